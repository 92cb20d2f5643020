"""Layout calculation engine.

This module provides the single entry point that turns an immutable
input snapshot into a complete LayoutResult. It runs the spacing
resolver, proportion generator, panel layout builder, peephole analyzer
and verification metrics in sequence. Every pass is independent and
deterministic; the engine holds no state between calls.
"""

from __future__ import annotations

import logging

from ..value_objects import LayoutInput, LayoutResult
from .panel_layout import build_panel_layout
from .peephole_analyzer import PeepholeAnalyzer
from .proportions import generate_weights, normalize_weights
from .spacing_resolver import SpacingResolver
from .verification import compute_verification_metrics

__all__ = [
    "LayoutEngine",
    "compute_layout",
]

logger = logging.getLogger(__name__)


class LayoutEngine:
    """Computes door panel layouts from input snapshots.

    Collaborators may be injected for testing; by default the engine
    creates its own.
    """

    def __init__(
        self,
        spacing_resolver: SpacingResolver | None = None,
        peephole_analyzer: PeepholeAnalyzer | None = None,
    ) -> None:
        self.spacing_resolver = spacing_resolver or SpacingResolver()
        self.peephole_analyzer = peephole_analyzer or PeepholeAnalyzer()

    def compute(self, layout_input: LayoutInput) -> LayoutResult:
        """Compute the full layout for one input snapshot.

        Never raises for numeric input. Degenerate or suboptimal layouts
        are reported through result fields (``fits``, spacing source,
        peephole conflicts, ratio error).

        Args:
            layout_input: Door, spacing, proportion and optional peephole.

        Returns:
            The complete LayoutResult.
        """
        door = layout_input.door
        proportion = layout_input.proportion

        weights = generate_weights(proportion.panel_count, proportion.proportion_type)
        normalized = normalize_weights(weights)
        panel_count = len(weights)

        spacing = self.spacing_resolver.resolve(
            door, panel_count, layout_input.spacing
        )
        layout = build_panel_layout(
            door,
            spacing.edge,
            spacing.gap,
            normalized,
            auto_spacing=spacing.auto_calculated,
        )
        if not layout.fits:
            logger.debug(
                f"Layout overflows: used {layout.total_used_height:.2f} of "
                f"{layout.available_height:.2f}"
            )

        peephole = None
        if layout_input.peephole is not None:
            peephole = self.peephole_analyzer.analyze(
                layout.positions, door, layout_input.peephole
            )

        verification = compute_verification_metrics(
            door,
            layout,
            spacing.edge,
            spacing.gap,
            layout_input.spacing.target_ratio,
        )

        return LayoutResult(
            door=door,
            proportion_type=proportion.proportion_type,
            spacing=spacing,
            weights=tuple(weights),
            normalized_weights=tuple(normalized),
            layout=layout,
            verification=verification,
            peephole=peephole,
        )


def compute_layout(layout_input: LayoutInput) -> LayoutResult:
    """Compute a door panel layout; see LayoutEngine.compute."""
    return LayoutEngine().compute(layout_input)
