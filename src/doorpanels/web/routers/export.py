"""Export format endpoints."""

from fastapi import APIRouter
from fastapi.responses import Response

from doorpanels.application.config import load_config_from_dict
from doorpanels.infrastructure.exporters import ExporterRegistry
from doorpanels.web.dependencies import CalculateCommandDep
from doorpanels.web.exceptions import (
    ExportError,
    LayoutCalculationError,
    UnsupportedFormatError,
)
from doorpanels.web.schemas.requests import ExportRequest
from doorpanels.web.schemas.responses import ExportFormatsSchema

router = APIRouter(prefix="/export", tags=["export"])


@router.get("/formats", response_model=ExportFormatsSchema)
async def list_export_formats() -> ExportFormatsSchema:
    """List all available export formats."""
    return ExportFormatsSchema(formats=ExporterRegistry.available_formats())


@router.post("/{format_name}")
async def export_layout(
    format_name: str,
    request: ExportRequest,
    command: CalculateCommandDep,
) -> Response:
    """Calculate a layout and return it in the requested format.

    Returns:
        The exported document with the exporter's media type, as an
        attachment named ``door.<extension>``.
    """
    if not ExporterRegistry.is_registered(format_name):
        raise UnsupportedFormatError(format_name, ExporterRegistry.available_formats())

    config = load_config_from_dict(request.to_config_dict())
    output = command.execute(config)
    if not output.is_valid or output.result is None:
        raise LayoutCalculationError(output.errors)

    exporter_class = ExporterRegistry.get(format_name)
    if format_name == "svg":
        exporter = exporter_class(preview_width=config.output.preview_width)
    else:
        exporter = exporter_class()

    try:
        content = exporter.export_string(output.result)
    except NotImplementedError as e:
        raise ExportError(str(e), format_name) from e

    filename = f"door.{exporter.file_extension}"
    return Response(
        content=content,
        media_type=exporter.media_type,
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
