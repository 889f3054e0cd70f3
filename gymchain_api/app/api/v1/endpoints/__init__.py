"""
Endpoint subpackage for API v1.

One module per domain, each defining an ``APIRouter`` that is included
in ``router.py``.
"""
