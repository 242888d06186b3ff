"""API routers for the REST API."""

from carcass.web.routers.designs import router as designs_router
from carcass.web.routers.templates import router as templates_router

__all__ = [
    "designs_router",
    "templates_router",
]
