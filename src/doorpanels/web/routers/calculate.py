"""Layout calculation endpoints."""

from fastapi import APIRouter

from doorpanels.application.config import load_config_from_dict
from doorpanels.application.dtos import LayoutOutput
from doorpanels.infrastructure.formatters import layout_result_to_dict
from doorpanels.web.dependencies import CalculateCommandDep
from doorpanels.web.exceptions import LayoutCalculationError
from doorpanels.web.schemas.requests import CalculateFromConfigRequest, CalculateRequest
from doorpanels.web.schemas.responses import LayoutResultSchema

router = APIRouter(prefix="/calculate", tags=["calculate"])


def layout_output_to_schema(output: LayoutOutput) -> LayoutResultSchema:
    """Convert LayoutOutput to the response schema."""
    if output.result is None:
        raise LayoutCalculationError(output.errors)
    data = layout_result_to_dict(output.result)
    data["is_valid"] = output.is_valid
    data["errors"] = output.errors
    data["warnings"] = [
        {"path": w.path, "message": w.message, "suggestion": w.suggestion}
        for w in output.validation.warnings
    ]
    return LayoutResultSchema.model_validate(data)


@router.post("", response_model=LayoutResultSchema)
async def calculate_layout(
    request: CalculateRequest,
    command: CalculateCommandDep,
) -> LayoutResultSchema:
    """Calculate a door panel layout.

    Overflowing layouts and peephole conflicts are reported in the
    response (``layout.fits``, ``warnings``), not as errors.
    """
    config = load_config_from_dict(request.to_config_dict())
    return layout_output_to_schema(command.execute(config))


@router.post("/config", response_model=LayoutResultSchema)
async def calculate_from_config(
    request: CalculateFromConfigRequest,
    command: CalculateCommandDep,
) -> LayoutResultSchema:
    """Calculate a layout from a full configuration document."""
    config = load_config_from_dict(request.config)
    return layout_output_to_schema(command.execute(config))
