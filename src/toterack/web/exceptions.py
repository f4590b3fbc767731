"""Error handlers for the REST API."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from toterack.application.config import ConfigError
from toterack.application.templates.manager import TemplateNotFoundError

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        logger.info(f"Rejected configuration ({exc.error_type}): {exc.message}")
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": exc.details or None,
            },
        )

    @app.exception_handler(TemplateNotFoundError)
    async def template_not_found_handler(
        request: Request, exc: TemplateNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "error": f"Template not found: {exc.name}",
                "error_type": "not_found",
                "details": None,
            },
        )
