"""API routers for the REST API."""

from seating.web.routers.configurations import router as configurations_router
from seating.web.routers.shapes import router as shapes_router
from seating.web.routers.validate import router as validate_router

__all__ = [
    "configurations_router",
    "shapes_router",
    "validate_router",
]
