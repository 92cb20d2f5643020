"""Domain services for door panel layout calculation.

This package provides the stateless pieces of the layout engine:
- Spacing resolution (manual pass-through or area-ratio solver)
- Proportion weight generation and normalization
- Panel layout building and fit validation
- Peephole placement search and conflict classification
- Area/ratio verification metrics
"""

from .constants import (
    DEFAULT_MIN_EDGE_DISTANCE,
    FALLBACK_EDGE_FRACTION,
    FIT_TOLERANCE,
    PEEPHOLE_IDEAL_HEIGHT,
    PHI,
)
from .layout_engine import LayoutEngine, compute_layout
from .panel_layout import build_panel_layout
from .peephole_analyzer import PeepholeAnalyzer, analyze_peephole, ideal_peephole_center
from .proportions import (
    PROPORTION_DESCRIPTIONS,
    describe_proportion,
    generate_weights,
    normalize_weights,
)
from .spacing_resolver import SpacingResolver, resolve_spacing, solve_edge_distance
from .verification import compute_verification_metrics

__all__ = [
    "DEFAULT_MIN_EDGE_DISTANCE",
    "FALLBACK_EDGE_FRACTION",
    "FIT_TOLERANCE",
    "LayoutEngine",
    "PEEPHOLE_IDEAL_HEIGHT",
    "PHI",
    "PROPORTION_DESCRIPTIONS",
    "PeepholeAnalyzer",
    "SpacingResolver",
    "analyze_peephole",
    "build_panel_layout",
    "compute_layout",
    "compute_verification_metrics",
    "describe_proportion",
    "generate_weights",
    "ideal_peephole_center",
    "normalize_weights",
    "resolve_spacing",
    "solve_edge_distance",
]
