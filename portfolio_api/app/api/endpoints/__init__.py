"""
Endpoint subpackage.

Each module in this package defines an APIRouter for one resource type
(e.g. projects, skills, contact).  The routers are aggregated in
``api/router.py``.
"""
