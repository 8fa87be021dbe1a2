"""
Endpoint subpackage.

Each module defines an APIRouter; the routers are aggregated in
``api/router.py``.
"""
