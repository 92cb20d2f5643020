"""JSON exporter for layout results."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from doorpanels.infrastructure.exporters.base import ExporterRegistry
from doorpanels.infrastructure.formatters import JsonLayoutFormatter

if TYPE_CHECKING:
    from doorpanels.domain.value_objects import LayoutResult


@ExporterRegistry.register("json")
class JsonExporter:
    """Exports the full layout result as JSON.

    Panels, gaps, spacing, peephole analysis and verification figures are
    all included; non-finite ratios are written as null.
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"
    media_type: ClassVar[str] = "application/json"

    def __init__(self, indent: int = 2) -> None:
        self.formatter = JsonLayoutFormatter(indent=indent)

    def export(self, result: LayoutResult, path: Path) -> None:
        path.write_text(self.export_string(result), encoding="utf-8")

    def export_string(self, result: LayoutResult) -> str:
        return self.formatter.format(result)
