"""Builds the quote API: routers under /api/v1 plus a /health check."""

import logging
from collections.abc import Sequence

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from toterack.web.exceptions import register_exception_handlers
from toterack.web.routers import (
    price_router,
    quote_router,
    templates_router,
    validate_router,
)

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"

_ROUTERS = (quote_router, price_router, validate_router, templates_router)


def create_app(allowed_origins: Sequence[str] = ("*",)) -> FastAPI:
    """Assemble the quote API.

    Args:
        allowed_origins: Origins a browser quoting page may call from.
    """
    app = FastAPI(
        title="Tote Rack Quote API",
        description=(
            "Quote 2x4 tote storage racks: rack dimensions, cut list, "
            "cheapest lumber, sale price, and profit."
        ),
        version="1.0.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(allowed_origins),
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    for router in _ROUTERS:
        app.include_router(router, prefix=API_PREFIX)

    @app.get("/health", tags=["health"])
    async def health_check() -> dict[str, str]:
        return {"status": "healthy"}

    logger.debug(f"Quote API ready with {len(_ROUTERS)} routers under {API_PREFIX}")
    return app


# ASGI entry point: uvicorn toterack.web:app
app = create_app()
