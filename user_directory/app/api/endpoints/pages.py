"""
HTML page routes.

Pages are fixed documents; nothing is rendered on the server.  Each
page loads its script from ``/static/js`` which fetches the data from
the JSON API once the document is ready.
"""

from fastapi import APIRouter
from fastapi.responses import FileResponse

from user_directory.app.core.config import VIEWS_DIR

router = APIRouter(include_in_schema=False)


@router.get("/")
async def home_page() -> FileResponse:
    return FileResponse(VIEWS_DIR / "home.html")


@router.get("/formulaire")
async def form_page() -> FileResponse:
    """Creation form."""
    return FileResponse(VIEWS_DIR / "formulaire.html")


@router.get("/user/{user_id}")
async def user_detail_page(user_id: str) -> FileResponse:
    # The id is read from the URL by user-detail.js.
    return FileResponse(VIEWS_DIR / "user-detail.html")
