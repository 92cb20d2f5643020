"""Area and ratio verification for a computed layout."""

from __future__ import annotations

import math

from ..value_objects import DoorSpec, PanelLayout, VerificationMetrics

__all__ = ["compute_verification_metrics"]


def compute_verification_metrics(
    door: DoorSpec,
    layout: PanelLayout,
    edge: float,
    gap: float,
    target_ratio: float,
) -> VerificationMetrics:
    """Compute area figures and the deviation from the target ratio.

    The negative space is decomposed into the border frame
    (``2eW + 2eH - 4e^2``), the gaps (``total gaps x panel width``) and a
    remainder that absorbs any residue left by the spacing fallback.

    Division by a zero negative-space area or a non-positive target
    reports infinity instead of raising.
    """
    total_door_area = door.width * door.height
    total_panel_area = sum(h * layout.panel_width for h in layout.heights)
    negative_space_area = total_door_area - total_panel_area

    if negative_space_area != 0:
        actual_ratio = total_panel_area / negative_space_area
    else:
        actual_ratio = math.inf

    if target_ratio > 0 and math.isfinite(target_ratio):
        ratio_error_pct = abs(actual_ratio - target_ratio) / target_ratio * 100
    else:
        ratio_error_pct = math.inf

    total_gaps = max(len(layout.positions) - 1, 0) * gap
    edge_area = 2 * edge * door.width + 2 * edge * door.height - 4 * edge * edge
    gap_area = total_gaps * layout.panel_width

    return VerificationMetrics(
        total_door_area=total_door_area,
        total_panel_area=total_panel_area,
        negative_space_area=negative_space_area,
        actual_ratio=actual_ratio,
        target_ratio=target_ratio,
        ratio_error_pct=ratio_error_pct,
        edge_area=edge_area,
        gap_area=gap_area,
        remainder_area=negative_space_area - edge_area - gap_area,
    )
