"""Output formatters for door panel layouts."""

from __future__ import annotations

import json
import math
from typing import Any

from doorpanels.domain.services import PHI, describe_proportion
from doorpanels.domain.value_objects import (
    LayoutResult,
    PanelConflictType,
    PeepholeAnalysis,
)


def _proportion_name(result: LayoutResult) -> str:
    value = result.proportion_type
    return value.value if hasattr(value, "value") else str(value)


def _finite_or_none(value: float) -> float | None:
    """Map non-finite floats to None so the value survives strict JSON."""
    return value if math.isfinite(value) else None


class LayoutReportFormatter:
    """Formats a layout result as a plain-text panel specification.

    The report lists panel width, per-panel heights with peephole badges,
    the golden ratio, used height and fit verdict, followed by spacing,
    peephole and area verification sections.
    """

    def __init__(self, unit: str = "cm", show_verification: bool = True) -> None:
        self.unit = unit
        self.show_verification = show_verification

    def format(self, result: LayoutResult) -> str:
        sections = [
            self._format_header(result),
            self._format_panels(result),
            self._format_spacing(result),
        ]
        if result.peephole is not None:
            sections.append(self._format_peephole(result.peephole))
        if self.show_verification:
            sections.append(self._format_verification(result))
        return "\n\n".join(sections)

    def _format_header(self, result: LayoutResult) -> str:
        name = _proportion_name(result)
        lines = [
            "DOOR PANEL LAYOUT",
            "=" * 60,
            f"Door: {result.door.width:.1f} x {result.door.height:.1f} {self.unit}",
            f"Proportion: {name} ({result.panel_count} panels)",
        ]
        description = describe_proportion(name)
        if description:
            lines.append(f"  {description}")
        ratios = " : ".join(f"{w:.2f}" for w in result.weights)
        lines.append(f"  Ratios: {ratios}")
        return "\n".join(lines)

    def _format_panels(self, result: LayoutResult) -> str:
        u = self.unit
        layout = result.layout
        lines = [
            "PANEL SPECIFICATIONS",
            "-" * 60,
            f"Panel width: {layout.panel_width:.1f} {u} (all panels)",
            "Panel heights:",
        ]

        conflicts = result.peephole.panel_conflicts if result.peephole else ()
        for index, height in enumerate(layout.heights):
            line = f"  Panel {index + 1}: {height:.1f} {u}"
            if index < len(conflicts) and conflicts[index].badge:
                line = f"{line:<30} {conflicts[index].badge}"
            lines.append(line)

        lines.append(f"Golden ratio (φ): {PHI:.4f}")
        lines.append(
            f"Total used height: {layout.total_used_height:.1f} / "
            f"{layout.available_height:.1f} {u}"
        )
        if result.fits:
            lines.append("✓ All panels fit perfectly")
        else:
            lines.append("⚠ Panels don't fit - reduce panel count or gaps")
        return "\n".join(lines)

    def _format_spacing(self, result: LayoutResult) -> str:
        u = self.unit
        spacing = result.spacing
        lines = [
            "SPACING",
            "-" * 60,
            f"Edge distance: {spacing.edge:.2f} {u}",
            f"Panel gap: {spacing.gap:.2f} {u}",
            f"Source: {spacing.source.value}",
            f"Available area: {result.layout.available_width:.1f} x "
            f"{result.layout.available_height:.1f} {u}",
        ]
        return "\n".join(lines)

    def _format_peephole(self, analysis: PeepholeAnalysis) -> str:
        u = self.unit
        coords = analysis.coordinates
        lines = [
            "PEEPHOLE",
            "-" * 60,
            f"Diameter: {analysis.diameter:.1f} {u}",
            f"Placement: {analysis.source.value}"
            + (" (in gap)" if analysis.in_gap else ""),
            f"Center: x={coords.x:.1f}, {coords.from_top:.1f} {u} from top, "
            f"{coords.from_bottom:.1f} {u} from bottom",
        ]
        if analysis.ideal_center is not None:
            lines.append(f"Ideal center: {analysis.ideal_center:.1f} {u} from top")

        for conflict in analysis.panel_conflicts:
            if conflict.conflict_type != PanelConflictType.NONE:
                lines.append(f"  Panel {conflict.panel_index + 1}: {conflict.message}")
        if analysis.gap_conflict.message:
            lines.append(f"  {analysis.gap_conflict.message}")
        return "\n".join(lines)

    def _format_verification(self, result: LayoutResult) -> str:
        v = result.verification
        u2 = f"{self.unit}²"
        lines = [
            "VERIFICATION",
            "-" * 60,
            f"Door area: {v.total_door_area:.1f} {u2}",
            f"Panel area: {v.total_panel_area:.1f} {u2}",
            f"Negative space: {v.negative_space_area:.1f} {u2}",
            f"  Edge frame: {v.edge_area:.1f} {u2}",
            f"  Gaps: {v.gap_area:.1f} {u2}",
            f"  Remainder: {v.remainder_area:.1f} {u2}",
            f"Ratio: {v.actual_ratio:.4f} (target {v.target_ratio:.4f}, "
            f"error {v.ratio_error_pct:.2f}%)",
        ]
        return "\n".join(lines)


def peephole_to_dict(analysis: PeepholeAnalysis) -> dict[str, Any]:
    """Convert a peephole analysis to a JSON-serializable dictionary."""
    gap = analysis.gap_conflict
    return {
        "diameter": analysis.diameter,
        "top": analysis.resolved_top,
        "center": analysis.center,
        "in_gap": analysis.in_gap,
        "source": analysis.source.value,
        "ideal_center": analysis.ideal_center,
        "coordinates": {
            "x": analysis.coordinates.x,
            "from_top": analysis.coordinates.from_top,
            "from_bottom": analysis.coordinates.from_bottom,
        },
        "panel_conflicts": [
            {
                "panel_index": c.panel_index,
                "type": c.conflict_type.value,
                "distance": c.distance,
                "message": c.message,
            }
            for c in analysis.panel_conflicts
        ],
        "gap_conflict": {
            "type": gap.conflict_type.value,
            "gap_index": gap.gap_index,
            "distance": gap.distance,
            "message": gap.message,
        },
        "has_conflict": analysis.has_conflict,
    }


def layout_result_to_dict(result: LayoutResult) -> dict[str, Any]:
    """Convert a layout result to a JSON-serializable dictionary.

    Infinite ratios are emitted as None.
    """
    layout = result.layout
    v = result.verification
    return {
        "door": {"width": result.door.width, "height": result.door.height},
        "proportion": {
            "type": _proportion_name(result),
            "panel_count": result.panel_count,
            "weights": list(result.weights),
            "normalized_weights": list(result.normalized_weights),
        },
        "spacing": {
            "edge": result.spacing.edge,
            "gap": result.spacing.gap,
            "source": result.spacing.source.value,
            "auto_calculated": result.spacing.auto_calculated,
        },
        "layout": {
            "panel_width": layout.panel_width,
            "available_width": layout.available_width,
            "available_height": layout.available_height,
            "available_height_for_panels": layout.available_height_for_panels,
            "total_used_height": layout.total_used_height,
            "fits": layout.fits,
            "panels": [
                {
                    "index": i,
                    "top": p.top,
                    "bottom": p.bottom,
                    "height": p.height,
                }
                for i, p in enumerate(layout.positions)
            ],
            "gaps": [
                {"index": g.index, "top": g.top, "bottom": g.bottom}
                for g in layout.gaps
            ],
        },
        "peephole": peephole_to_dict(result.peephole) if result.peephole else None,
        "verification": {
            "total_door_area": v.total_door_area,
            "total_panel_area": v.total_panel_area,
            "negative_space_area": v.negative_space_area,
            "actual_ratio": _finite_or_none(v.actual_ratio),
            "target_ratio": _finite_or_none(v.target_ratio),
            "ratio_error_pct": _finite_or_none(v.ratio_error_pct),
            "edge_area": v.edge_area,
            "gap_area": v.gap_area,
            "remainder_area": v.remainder_area,
        },
    }


class JsonLayoutFormatter:
    """Formats a layout result as indented JSON."""

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def format(self, result: LayoutResult) -> str:
        return json.dumps(layout_result_to_dict(result), indent=self.indent)
