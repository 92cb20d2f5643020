"""Plain-text report exporter."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from doorpanels.infrastructure.exporters.base import ExporterRegistry
from doorpanels.infrastructure.formatters import LayoutReportFormatter

if TYPE_CHECKING:
    from doorpanels.domain.value_objects import LayoutResult


@ExporterRegistry.register("text")
class TextReportExporter:
    """Exports the panel specification report as UTF-8 text."""

    format_name: ClassVar[str] = "text"
    file_extension: ClassVar[str] = "txt"
    media_type: ClassVar[str] = "text/plain"

    def __init__(self, unit: str = "cm", show_verification: bool = True) -> None:
        self.formatter = LayoutReportFormatter(
            unit=unit, show_verification=show_verification
        )

    def export(self, result: LayoutResult, path: Path) -> None:
        path.write_text(self.export_string(result) + "\n", encoding="utf-8")

    def export_string(self, result: LayoutResult) -> str:
        return self.formatter.format(result)
