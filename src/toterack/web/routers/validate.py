"""Configuration validation endpoints."""

from fastapi import APIRouter

from toterack.application.config import load_config_from_dict, validate_config
from toterack.web.schemas.requests import ConfigValidateRequest
from toterack.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_configuration(
    request: ConfigValidateRequest,
) -> ValidationResultSchema:
    """Validate a quote configuration without quoting it.

    Configurations that fail to parse are reported through the ConfigError
    handler with status 422.
    """
    config = load_config_from_dict(request.config)
    result = validate_config(config)

    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[{"message": e.message, "path": e.path} for e in result.errors],
        warnings=[{"message": w.message, "path": w.path} for w in result.warnings],
    )
