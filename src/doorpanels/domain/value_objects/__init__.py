"""Value objects for the door panel domain.

This module provides immutable data types used throughout the layout
engine. All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

# Door, spacing and proportions
from ._door import (
    DoorSpec,
    ProportionSpec,
    ProportionType,
    SpacingConfig,
)

# Peephole placement and conflicts
from ._peephole import (
    ConflictModel,
    GapConflict,
    GapConflictType,
    PanelConflict,
    PanelConflictType,
    PeepholeAnalysis,
    PeepholeCoordinates,
    PeepholeSpec,
    PlacementSource,
)

# Layout input and results
from ._layout import (
    EffectiveSpacing,
    GapPosition,
    LayoutInput,
    LayoutResult,
    PanelLayout,
    PanelPosition,
    SpacingSource,
    VerificationMetrics,
    gaps_between,
)

__all__ = [
    "ConflictModel",
    "DoorSpec",
    "EffectiveSpacing",
    "GapConflict",
    "GapConflictType",
    "GapPosition",
    "LayoutInput",
    "LayoutResult",
    "PanelConflict",
    "PanelConflictType",
    "PanelLayout",
    "PanelPosition",
    "PeepholeAnalysis",
    "PeepholeCoordinates",
    "PeepholeSpec",
    "PlacementSource",
    "ProportionSpec",
    "ProportionType",
    "SpacingConfig",
    "SpacingSource",
    "VerificationMetrics",
    "gaps_between",
]
