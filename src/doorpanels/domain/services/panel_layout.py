"""Panel layout builder.

Turns effective spacing and normalized proportion weights into absolute
panel positions, a shared panel width and a fit verdict.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..value_objects import DoorSpec, PanelLayout, PanelPosition
from .constants import FIT_TOLERANCE

__all__ = ["build_panel_layout"]


def build_panel_layout(
    door: DoorSpec,
    edge: float,
    gap: float,
    normalized_weights: Sequence[float],
    auto_spacing: bool = False,
) -> PanelLayout:
    """Lay panels out top to bottom inside the door.

    Algorithm:
    1. Panel width is the door width minus both edge margins
    2. Height for panels is the door height minus both margins and all
       gaps, clamped to zero
    3. Each panel gets its weight share of that height
    4. Panels are stacked from ``y = edge``, each followed by one gap

    Auto-calculated spacing always fits by construction. Manual spacing
    fits when the used height stays within the available height plus a
    small floating-point tolerance.

    Args:
        door: Door dimensions.
        edge: Effective edge distance.
        gap: Effective gap between panels.
        normalized_weights: Height shares summing to one, top to bottom.
        auto_spacing: Whether the spacing came from the auto solver.

    Returns:
        PanelLayout with positions, width and fit verdict.

    Example:
        >>> layout = build_panel_layout(DoorSpec(103, 201), 15, 10, [0.5, 0.5])
        >>> [round(p.height, 1) for p in layout.positions]
        [80.5, 80.5]
    """
    panel_count = len(normalized_weights)
    total_gaps = max(panel_count - 1, 0) * gap

    available_width = door.width - 2 * edge
    available_height = door.height - 2 * edge
    available_for_panels = max(0.0, available_height - total_gaps)

    heights = [share * available_for_panels for share in normalized_weights]

    positions: list[PanelPosition] = []
    current_y = edge
    for height in heights:
        position = PanelPosition(top=current_y, bottom=current_y + height)
        positions.append(position)
        current_y = position.bottom + gap

    total_used_height = sum(heights) + total_gaps

    if auto_spacing:
        fits = True
    else:
        fits = total_used_height <= available_height + FIT_TOLERANCE

    return PanelLayout(
        positions=tuple(positions),
        panel_width=available_width,
        available_width=available_width,
        available_height=available_height,
        available_height_for_panels=available_for_panels,
        total_used_height=total_used_height,
        fits=fits,
    )
