"""
User endpoints.

All request validation happens here: both fields must be present, the
email must look like ``local@domain.tld`` and must not belong to
another user.  The service below only performs the storage work.
"""

import re
from typing import List

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from user_directory.app.core.errors import ConflictError, NotFoundError, ValidationError
from user_directory.app.schemas.user import MessageResponse, User, UserPayload
from user_directory.app.services.user_service import UserService, get_user_service

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

router = APIRouter()


def validate_payload(payload: UserPayload) -> tuple:
    """Return the ``(name, email)`` pair or raise ``ValidationError``."""
    name = payload.name
    email = payload.email
    if not name or not email:
        raise ValidationError("Name and email are required")
    if not EMAIL_PATTERN.match(email):
        raise ValidationError("Invalid email format")
    return name, email


@router.get("", response_model=List[User])
async def list_users(service: UserService = Depends(get_user_service)) -> List[User]:
    """Return every user."""
    return service.list_all()


@router.get("/{user_id}", response_model=User)
async def get_user(user_id: int, service: UserService = Depends(get_user_service)) -> User:
    """Return a single user, or 404 if the id is unknown."""
    user = service.get_by_id(user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user


@router.post("", response_model=User, status_code=status.HTTP_201_CREATED)
async def create_user(
    payload: UserPayload,
    service: UserService = Depends(get_user_service),
) -> User:
    """Create a user.

    New users always get the default role; a ``role`` sent by the
    client is ignored.
    """
    name, email = validate_payload(payload)
    if service.email_taken(email):
        raise ConflictError("A user with this email already exists")
    return service.create(name, email)


@router.put("/{user_id}", response_model=User)
async def update_user(
    user_id: int,
    payload: UserPayload,
    service: UserService = Depends(get_user_service),
) -> User:
    """Replace the name and email of a user; the role is left untouched."""
    name, email = validate_payload(payload)
    if service.get_by_id(user_id) is None:
        raise NotFoundError("User not found")
    if service.email_taken(email, exclude_id=user_id):
        raise ConflictError("Another user already uses this email")
    return service.update(user_id, name, email)


@router.delete("/{user_id}", response_model=MessageResponse)
async def delete_user(user_id: int, service: UserService = Depends(get_user_service)):
    """Delete a user.

    The service reports storage failures as ``False`` without detail, so
    they surface here as a bare 500.
    """
    if service.get_by_id(user_id) is None:
        raise NotFoundError("User not found")
    if not service.delete(user_id):
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Error while deleting the user"},
        )
    return MessageResponse(message="User deleted successfully")
