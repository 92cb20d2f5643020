"""API routers for the REST API."""

from doorpanels.web.routers.calculate import router as calculate_router
from doorpanels.web.routers.export import router as export_router
from doorpanels.web.routers.validate import router as validate_router

__all__ = [
    "calculate_router",
    "export_router",
    "validate_router",
]
