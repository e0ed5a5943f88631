"""
Endpoint subpackage.

Each module defines an APIRouter for one concern; the routers are
aggregated in ``bank_api.app.api.router``.
"""
