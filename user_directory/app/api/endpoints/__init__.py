"""
Endpoint modules.  Each module defines an ``APIRouter`` that is
aggregated in ``api/router.py``.
"""
