"""Spacing resolution for door panel layouts.

This module determines the effective edge distance and panel gap. In
manual mode the configured values pass through untouched; in auto mode
the edge distance is solved so that the ratio of panel area to negative
space matches the target ratio, with the gap tied to the edge by
``gap = edge / target_ratio``.
"""

from __future__ import annotations

import logging
import math

from ..value_objects import DoorSpec, EffectiveSpacing, SpacingConfig, SpacingSource
from .constants import (
    FALLBACK_EDGE_FRACTION,
    MAX_SOLVED_EDGE_DIVISOR,
    MIN_SOLVED_EDGE,
    PHI,
)

__all__ = [
    "SpacingResolver",
    "resolve_spacing",
    "solve_edge_distance",
]

logger = logging.getLogger(__name__)


def solve_edge_distance(
    width: float,
    height: float,
    panel_count: int,
    target_ratio: float,
) -> float | None:
    """Solve the area-ratio quadratic for the edge distance.

    With ``k = 2 + (n - 1) / r`` the panel area is
    ``(W - 2e) * (H - k*e)``. Requiring
    ``panel_area / (W*H - panel_area) = r`` gives

        2k*e^2 - (k*W + 2*H)*e + W*H / (1 + r) = 0

    Args:
        width: Door width.
        height: Door height.
        panel_count: Number of panels.
        target_ratio: Target ratio of panel area to negative space.

    Returns:
        The real root with the smaller magnitude, or None when the
        discriminant is negative or the equation is degenerate.
    """
    k = 2 + (panel_count - 1) / target_ratio
    a = 2 * k
    b = -(k * width + 2 * height)
    c = width * height / (1 + target_ratio)

    if a == 0:
        if b == 0:
            return None
        return -c / b

    discriminant = b * b - 4 * a * c
    if discriminant < 0:
        return None

    root = math.sqrt(discriminant)
    candidates = ((-b - root) / (2 * a), (-b + root) / (2 * a))
    return min(candidates, key=abs)


class SpacingResolver:
    """Resolves effective edge distance and panel gap.

    The resolver always produces a usable spacing: unsolvable or
    out-of-range solutions fall back to an edge distance of 5% of the
    door height rather than failing.

    Example:
        resolver = SpacingResolver()
        spacing = resolver.resolve(DoorSpec(103, 201), 2, SpacingConfig(auto_calculate=True))
    """

    def resolve(
        self,
        door: DoorSpec,
        panel_count: int,
        config: SpacingConfig,
    ) -> EffectiveSpacing:
        """Resolve spacing for a door and panel count.

        Args:
            door: Door dimensions.
            panel_count: Number of panels in the layout.
            config: Spacing configuration.

        Returns:
            EffectiveSpacing with the edge, gap and how they were obtained.
        """
        if not config.auto_calculate:
            return EffectiveSpacing(
                edge=config.edge_distance,
                gap=config.panel_gap,
                source=SpacingSource.MANUAL,
            )

        ratio = config.target_ratio
        if not math.isfinite(ratio) or ratio <= 0:
            logger.debug(
                f"Target ratio {ratio} unusable, falling back to φ for gap spacing"
            )
            return self._fallback(door, PHI)

        edge = solve_edge_distance(door.width, door.height, panel_count, ratio)
        if edge is None:
            logger.debug("Spacing quadratic has no real root, using fallback edge")
            return self._fallback(door, ratio)

        max_edge = door.height / MAX_SOLVED_EDGE_DIVISOR
        if not MIN_SOLVED_EDGE <= edge <= max_edge:
            logger.debug(
                f"Solved edge {edge:.3f} outside [{MIN_SOLVED_EDGE}, {max_edge:.3f}], "
                "using fallback edge"
            )
            return self._fallback(door, ratio)

        return EffectiveSpacing(
            edge=edge,
            gap=edge / ratio,
            source=SpacingSource.SOLVED,
        )

    def _fallback(self, door: DoorSpec, ratio: float) -> EffectiveSpacing:
        edge = door.height * FALLBACK_EDGE_FRACTION
        return EffectiveSpacing(
            edge=edge,
            gap=edge / ratio,
            source=SpacingSource.FALLBACK,
        )


def resolve_spacing(
    door: DoorSpec,
    panel_count: int,
    config: SpacingConfig,
) -> EffectiveSpacing:
    """Resolve effective spacing; see SpacingResolver.resolve."""
    return SpacingResolver().resolve(door, panel_count, config)
