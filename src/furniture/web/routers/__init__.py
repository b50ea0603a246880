"""API routers for the REST API."""

from furniture.web.routers.generate import router as generate_router
from furniture.web.routers.quote import router as quote_router
from furniture.web.routers.templates import router as templates_router
from furniture.web.routers.validate import router as validate_router

__all__ = [
    "generate_router",
    "quote_router",
    "templates_router",
    "validate_router",
]
