"""Infrastructure layer - formatters, rendering and exporters."""

from doorpanels.infrastructure.door_renderer import DoorPreviewRenderer
from doorpanels.infrastructure.exporters import (
    DxfExporter,
    ExporterRegistry,
    ExportManager,
    JsonExporter,
    SvgExporter,
    TextReportExporter,
)
from doorpanels.infrastructure.formatters import (
    JsonLayoutFormatter,
    LayoutReportFormatter,
    layout_result_to_dict,
    peephole_to_dict,
)

__all__ = [
    "DoorPreviewRenderer",
    "DxfExporter",
    "ExportManager",
    "ExporterRegistry",
    "JsonExporter",
    "JsonLayoutFormatter",
    "LayoutReportFormatter",
    "SvgExporter",
    "TextReportExporter",
    "layout_result_to_dict",
    "peephole_to_dict",
]
