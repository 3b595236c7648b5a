"""
Endpoint modules.

Each module defines an ``APIRouter`` for one domain; they are combined
in ``api/router.py``.
"""
