"""DXF format exporter for door panel layouts.

Generates 2D DXF files (R2010 format) with the door outline, the
available area, panel outlines, the peephole bore and labels on
separate layers, ready for a router or CAD import.
"""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, cast

import ezdxf

from doorpanels.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from ezdxf.document import Drawing
    from ezdxf.layouts import Modelspace

    from doorpanels.domain.value_objects import LayoutResult, PeepholeAnalysis


logger = logging.getLogger(__name__)


# Layer configuration for DXF output
LAYERS = {
    "DOOR": {"color": 7, "linetype": "CONTINUOUS"},  # White - door outline
    "AVAILABLE": {"color": 8, "linetype": "DASHED"},  # Gray - inside edge margin
    "PANELS": {"color": 3, "linetype": "CONTINUOUS"},  # Green - panel outlines
    "PEEPHOLE": {"color": 1, "linetype": "CONTINUOUS"},  # Red - peephole bore
    "LABELS": {"color": 5, "linetype": "CONTINUOUS"},  # Blue - text labels
}


@ExporterRegistry.register("dxf")
class DxfExporter:
    """Exports door panel layouts to DXF.

    The drawing uses the door's own unit with the origin at the bottom
    left corner of the door and Y pointing up, so a panel measured
    ``top`` from the door top sits at ``height - top``.

    Attributes:
        format_name: "dxf"
        file_extension: "dxf"
    """

    format_name: ClassVar[str] = "dxf"
    file_extension: ClassVar[str] = "dxf"
    media_type: ClassVar[str] = "application/dxf"

    def __init__(self, scale: float = 1.0, include_labels: bool = True) -> None:
        """Initialize the DXF exporter.

        Args:
            scale: Multiplier from door units to drawing units (e.g. 10.0
                for centimetres to millimetres).
            include_labels: Whether to add panel labels with dimensions.
        """
        if scale <= 0:
            raise ValueError(f"Invalid scale: {scale}. Must be positive")
        self.scale = scale
        self.include_labels = include_labels

    def export(self, result: LayoutResult, path: Path) -> None:
        """Export a layout result to a DXF file."""
        doc = self._build_document(result)
        doc.saveas(path)
        logger.info(f"Exported DXF to {path}")

    def export_string(self, result: LayoutResult) -> str:
        """Export a layout result as DXF text."""
        doc = self._build_document(result)
        stream = StringIO()
        doc.write(stream)
        return stream.getvalue()

    def _build_document(self, result: LayoutResult) -> Drawing:
        doc = self._create_document()
        msp = doc.modelspace()
        self._draw_door(msp, result)
        self._draw_panels(msp, result)
        if result.peephole is not None:
            self._draw_peephole(msp, result.peephole)
        return doc

    def _create_document(self) -> Drawing:
        doc = ezdxf.new("R2010")
        self._setup_layers(doc)
        return doc

    def _setup_layers(self, doc: Drawing) -> None:
        """Create DXF layers with their colors and linetypes."""
        for name, props in LAYERS.items():
            layer = doc.layers.add(name, color=cast(int, props["color"]))
            if props["linetype"] == "DASHED":
                if "DASHED" not in doc.linetypes:
                    doc.linetypes.add(
                        "DASHED",
                        pattern=[0.5, 0.25, -0.25],
                        description="Dashed line",
                    )
                layer.dxf.linetype = "DASHED"

    def _rect(
        self,
        msp: Modelspace,
        x: float,
        y: float,
        width: float,
        height: float,
        layer: str,
    ) -> None:
        """Draw a closed rectangle from its bottom-left corner."""
        s = self.scale
        points = [
            (x * s, y * s),
            ((x + width) * s, y * s),
            ((x + width) * s, (y + height) * s),
            (x * s, (y + height) * s),
            (x * s, y * s),
        ]
        msp.add_lwpolyline(points, dxfattribs={"layer": layer})

    def _draw_door(self, msp: Modelspace, result: LayoutResult) -> None:
        door = result.door
        edge = result.spacing.edge
        self._rect(msp, 0.0, 0.0, door.width, door.height, "DOOR")

        available_w = result.layout.available_width
        available_h = result.layout.available_height
        if available_w > 0 and available_h > 0:
            self._rect(msp, edge, edge, available_w, available_h, "AVAILABLE")

    def _draw_panels(self, msp: Modelspace, result: LayoutResult) -> None:
        """Draw every panel with positive size, with an optional label."""
        door_h = result.door.height
        edge = result.spacing.edge
        width = result.panel_width
        s = self.scale

        for index, position in enumerate(result.layout.positions):
            height = position.height
            if width <= 0 or height <= 0:
                continue
            bottom_y = door_h - position.bottom
            self._rect(msp, edge, bottom_y, width, height, "PANELS")

            if self.include_labels:
                text_height = max(0.5, min(width, height) * 0.08) * s
                msp.add_mtext(
                    f"Panel {index + 1}\n{width:.1f} x {height:.1f}",
                    dxfattribs={
                        "layer": "LABELS",
                        "char_height": text_height,
                        "insert": ((edge + width / 2) * s, (bottom_y + height / 2) * s),
                        "attachment_point": 5,  # MIDDLE_CENTER
                    },
                )

    def _draw_peephole(self, msp: Modelspace, analysis: PeepholeAnalysis) -> None:
        s = self.scale
        cx = analysis.coordinates.x * s
        cy = analysis.coordinates.from_bottom * s
        msp.add_circle((cx, cy), analysis.diameter / 2 * s, dxfattribs={"layer": "PEEPHOLE"})


__all__ = ["DxfExporter", "LAYERS"]
