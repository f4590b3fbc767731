"""Quote generation endpoints."""

from fastapi import APIRouter

from toterack.application.config import config_to_quote_input, load_config_from_dict
from toterack.application.dtos import QuoteOutput
from toterack.infrastructure import JsonExporter
from toterack.web.dependencies import QuoteCommandDep
from toterack.web.schemas.requests import QuoteFromConfigRequest, QuoteRequest
from toterack.web.schemas.responses import QuoteResponseSchema

router = APIRouter(prefix="/quote", tags=["quote"])


def _output_to_schema(output: QuoteOutput) -> QuoteResponseSchema:
    """Convert QuoteOutput to the response schema."""
    return QuoteResponseSchema.model_validate(JsonExporter().to_dict(output))


@router.post("", response_model=QuoteResponseSchema)
async def generate_quote(
    request: QuoteRequest,
    command: QuoteCommandDep,
) -> QuoteResponseSchema:
    """Generate a quote with default lumber prices and consumables.

    Raises:
        ConfigError: If the request does not form a valid configuration
            (handled by exception handler).
    """
    config = load_config_from_dict(request.to_config_dict())
    output = command.execute(config_to_quote_input(config))
    return _output_to_schema(output)


@router.post("/config", response_model=QuoteResponseSchema)
async def generate_quote_from_config(
    request: QuoteFromConfigRequest,
    command: QuoteCommandDep,
) -> QuoteResponseSchema:
    """Generate a quote from a full configuration.

    Raises:
        ConfigError: If the configuration is invalid (handled by exception
            handler).
    """
    config = load_config_from_dict(request.config)
    output = command.execute(config_to_quote_input(config))
    return _output_to_schema(output)
