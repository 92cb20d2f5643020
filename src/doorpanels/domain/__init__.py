"""Domain layer - core layout calculation."""

from .services import (
    PHI,
    LayoutEngine,
    PeepholeAnalyzer,
    SpacingResolver,
    build_panel_layout,
    compute_layout,
    describe_proportion,
    generate_weights,
    normalize_weights,
)
from .value_objects import (
    ConflictModel,
    DoorSpec,
    LayoutInput,
    LayoutResult,
    PeepholeSpec,
    ProportionSpec,
    ProportionType,
    SpacingConfig,
)

__all__ = [
    "ConflictModel",
    "DoorSpec",
    "LayoutEngine",
    "LayoutInput",
    "LayoutResult",
    "PHI",
    "PeepholeAnalyzer",
    "PeepholeSpec",
    "ProportionSpec",
    "ProportionType",
    "SpacingConfig",
    "SpacingResolver",
    "build_panel_layout",
    "compute_layout",
    "describe_proportion",
    "generate_weights",
    "normalize_weights",
]
