"""Door preview rendering.

This module renders an SVG preview of a computed layout: the door body,
the dashed available area, numbered panels in alternating wood tones,
the peephole, the handle and two hinges.
"""

from __future__ import annotations

from doorpanels.domain.value_objects import LayoutResult, PeepholeAnalysis

# Alternating panel fills and strokes
PANEL_FILLS: tuple[str, ...] = ("#F5DEB3", "#DEB887", "#D2B48C", "#CDAA3D", "#DAA520")
PANEL_STROKES: tuple[str, ...] = ("#D2691E", "#CD853F", "#A0522D", "#B8860B", "#B8860B")

DOOR_FILL = "#8B4513"  # Saddle brown
DOOR_STROKE = "#654321"
HANDLE_FILL = "#FFD700"  # Gold
HANDLE_STROKE = "#DAA520"
HINGE_FILL = "#C0C0C0"  # Silver
HINGE_STROKE = "#A0A0A0"


class DoorPreviewRenderer:
    """Renders a layout result as an SVG door preview.

    Attributes:
        preview_width: Pixel width of the door body; the scale is derived
            from it so the whole door keeps its aspect ratio.
        margin: Pixels of white space around the door.
        show_labels: Whether to number the panels.
    """

    def __init__(
        self,
        preview_width: float = 380.0,
        margin: float = 20.0,
        show_labels: bool = True,
    ) -> None:
        self.preview_width = preview_width
        self.margin = margin
        self.show_labels = show_labels

    def scale_for(self, result: LayoutResult) -> float:
        """Pixels per door unit. Zero for a zero-width door."""
        if result.door.width <= 0:
            return 0.0
        return self.preview_width / result.door.width

    def render_svg(self, result: LayoutResult) -> str:
        """Generate the SVG preview.

        Panels are drawn only when the layout fits; an overflowing layout
        shows the door and its available area alone.
        """
        scale = self.scale_for(result)
        m = self.margin
        door_w = result.door.width * scale
        door_h = result.door.height * scale
        edge = result.spacing.edge * scale

        parts: list[str] = [
            f'<svg width="{door_w + 2 * m}" height="{door_h + 2 * m}" '
            f'xmlns="http://www.w3.org/2000/svg">',
            "",
            "  <!-- Background -->",
            f'  <rect x="0" y="0" width="{door_w + 2 * m}" height="{door_h + 2 * m}" '
            f'fill="white"/>',
            "",
            "  <!-- Door outline -->",
            f'  <rect x="{m}" y="{m}" width="{door_w}" height="{door_h}" '
            f'fill="{DOOR_FILL}" stroke="{DOOR_STROKE}" stroke-width="3"/>',
            "",
            "  <!-- Available area -->",
            f'  <rect x="{m + edge}" y="{m + edge}" '
            f'width="{max(result.layout.available_width, 0.0) * scale}" '
            f'height="{max(result.layout.available_height, 0.0) * scale}" '
            f'fill="none" stroke="#999" stroke-width="1" stroke-dasharray="5,5"/>',
        ]

        if result.fits:
            parts.append("")
            parts.append("  <!-- Panels -->")
            for index, position in enumerate(result.layout.positions):
                parts.append(
                    self._render_panel(
                        index,
                        m + edge,
                        m + position.top * scale,
                        result.panel_width * scale,
                        position.height * scale,
                    )
                )

        if result.peephole is not None:
            parts.append("")
            parts.append("  <!-- Peephole -->")
            parts.append(self._render_peephole(result.peephole, scale))

        parts.append("")
        parts.append("  <!-- Hardware -->")
        parts.append(self._render_hardware(door_w, door_h))
        parts.append("")
        parts.append("</svg>")
        return "\n".join(parts)

    def _render_panel(
        self, index: int, x: float, y: float, w: float, h: float
    ) -> str:
        fill = PANEL_FILLS[index % len(PANEL_FILLS)]
        stroke = PANEL_STROKES[index % len(PANEL_STROKES)]
        svg_parts = [
            "  <g>",
            f'    <rect x="{x}" y="{y}" width="{w}" height="{h}" '
            f'fill="{fill}" stroke="{stroke}" stroke-width="2"/>',
        ]
        if self.show_labels:
            svg_parts.append(
                f'    <text x="{x + w / 2}" y="{y + h / 2}" text-anchor="middle" '
                f'dominant-baseline="middle" font-family="Arial, sans-serif" '
                f'font-size="12" font-weight="bold" fill="{DOOR_FILL}">{index + 1}</text>'
            )
        svg_parts.append("  </g>")
        return "\n".join(svg_parts)

    def _render_peephole(self, analysis: PeepholeAnalysis, scale: float) -> str:
        m = self.margin
        cx = m + analysis.coordinates.x * scale
        cy = m + analysis.coordinates.from_top * scale
        r = analysis.diameter / 2 * scale
        stroke = "#CC0000" if analysis.has_conflict else "#666"
        return (
            "  <g>\n"
            f'    <circle cx="{cx}" cy="{cy}" r="{r}" fill="#000" '
            f'stroke="{stroke}" stroke-width="1"/>\n'
            f'    <text x="{cx + r + 3 * scale}" y="{cy}" dominant-baseline="middle" '
            f'font-family="Arial, sans-serif" font-size="10" fill="#666">Peephole</text>\n'
            "  </g>"
        )

    def _render_hardware(self, door_w: float, door_h: float) -> str:
        m = self.margin
        return "\n".join(
            [
                f'  <circle cx="{m + door_w - 15}" cy="{m + door_h / 2}" r="5" '
                f'fill="{HANDLE_FILL}" stroke="{HANDLE_STROKE}" stroke-width="2"/>',
                f'  <rect x="{m + 2}" y="{m + 30}" width="8" height="15" '
                f'fill="{HINGE_FILL}" stroke="{HINGE_STROKE}" stroke-width="1"/>',
                f'  <rect x="{m + 2}" y="{m + door_h - 45}" width="8" height="15" '
                f'fill="{HINGE_FILL}" stroke="{HINGE_STROKE}" stroke-width="1"/>',
            ]
        )
