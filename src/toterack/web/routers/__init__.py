"""API routers for the REST API."""

from toterack.web.routers.price import router as price_router
from toterack.web.routers.quote import router as quote_router
from toterack.web.routers.templates import router as templates_router
from toterack.web.routers.validate import router as validate_router

__all__ = [
    "price_router",
    "quote_router",
    "templates_router",
    "validate_router",
]
