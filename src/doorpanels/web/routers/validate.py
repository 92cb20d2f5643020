"""Configuration validation endpoints."""

from fastapi import APIRouter

from doorpanels.application.config import load_config_from_dict, validate_config
from doorpanels.web.schemas.requests import ConfigValidateRequest
from doorpanels.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_configuration(
    request: ConfigValidateRequest,
) -> ValidationResultSchema:
    """Validate a door panel configuration and report layout advisories.

    Schema errors are returned as a 422 response by the ConfigError handler.
    """
    config = load_config_from_dict(request.config)
    result = validate_config(config)

    return ValidationResultSchema(
        is_valid=result.is_valid,
        exit_code=result.exit_code,
        errors=[{"message": e.message, "path": e.path} for e in result.errors],
        warnings=[
            {"message": w.message, "path": w.path, "suggestion": w.suggestion}
            for w in result.warnings
        ],
    )
