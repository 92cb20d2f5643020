"""SVG exporter for door previews.

Wraps DoorPreviewRenderer to write the door preview as an SVG file.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from doorpanels.infrastructure.door_renderer import DoorPreviewRenderer
from doorpanels.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from doorpanels.domain.value_objects import LayoutResult

logger = logging.getLogger(__name__)


@ExporterRegistry.register("svg")
class SvgExporter:
    """SVG exporter for the door preview.

    Attributes:
        format_name: Identifier for this export format.
        file_extension: File extension for SVG files.
    """

    format_name: ClassVar[str] = "svg"
    file_extension: ClassVar[str] = "svg"
    media_type: ClassVar[str] = "image/svg+xml"

    def __init__(self, preview_width: float = 380.0, show_labels: bool = True) -> None:
        """Initialize the SVG exporter.

        Args:
            preview_width: Pixel width of the door body (default 380).
            show_labels: Whether to number the panels (default True).
        """
        self.renderer = DoorPreviewRenderer(
            preview_width=preview_width, show_labels=show_labels
        )

    def export(self, result: LayoutResult, path: Path) -> None:
        path.write_text(self.export_string(result), encoding="utf-8")
        logger.info(f"Exported SVG preview to {path}")

    def export_string(self, result: LayoutResult) -> str:
        return self.renderer.render_svg(result)
