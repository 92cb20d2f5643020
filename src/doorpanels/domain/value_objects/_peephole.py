"""Peephole specification and conflict value objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ConflictModel(str, Enum):
    """How peephole clearance is measured against panel and gap edges.

    In both models the peephole is contained in a panel when its whole
    span lies within it.

    Attributes:
        RADIUS_AWARE: Clearance is measured from the peephole rim to the
            nearer edge.
        LEGACY: Clearance is measured from the peephole center to the
            nearer edge, as the first release of the calculator did.
    """

    RADIUS_AWARE = "radius_aware"
    LEGACY = "legacy"


class PanelConflictType(str, Enum):
    """Relation between the peephole and one panel."""

    NONE = "none"
    INSIDE_SAFE = "inside_safe"
    TOO_CLOSE_TO_EDGE = "too_close_to_edge"
    CROSSES_EDGE = "crosses_edge"


class GapConflictType(str, Enum):
    """Relation between the peephole center and the gap it sits in."""

    NONE = "none"
    GAP_SAFE = "gap_safe"
    GAP_TOO_CLOSE = "gap_too_close"


class PlacementSource(str, Enum):
    """Where the resolved peephole position came from.

    Attributes:
        FIXED: The user-supplied distance from the top was used as is.
        PANEL: Auto-placement chose a panel center.
        GAP: Auto-placement chose a gap center.
        IDEAL: Auto-placement found no admissible candidate and used the
            ergonomic ideal position.
    """

    FIXED = "fixed"
    PANEL = "panel"
    GAP = "gap"
    IDEAL = "ideal"


@dataclass(frozen=True)
class PeepholeSpec:
    """Circular peephole cutout request.

    Attributes:
        diameter: Peephole diameter.
        distance_from_top: Top of the peephole measured from the door top,
            used when ``auto_center`` is off.
        auto_center: Search panel and gap centers for the best position.
        prefer_gap_placement: Prefer gap candidates over panel candidates.
        min_edge_distance: Minimum clearance between the peephole rim and
            any panel edge.
        conflict_model: Containment/clearance model for classification.
    """

    diameter: float = 6.0
    distance_from_top: float = 45.0
    auto_center: bool = False
    prefer_gap_placement: bool = False
    min_edge_distance: float = 10.0
    conflict_model: ConflictModel = ConflictModel.RADIUS_AWARE

    @property
    def radius(self) -> float:
        return self.diameter / 2


@dataclass(frozen=True)
class PanelConflict:
    """Classification of the peephole against a single panel.

    ``distance`` is the clearance to the nearer panel edge; it is None
    when the peephole has no relation to the panel.
    """

    panel_index: int
    conflict_type: PanelConflictType
    distance: float | None = None

    @property
    def is_conflict(self) -> bool:
        """True for placements that need attention."""
        return self.conflict_type in (
            PanelConflictType.TOO_CLOSE_TO_EDGE,
            PanelConflictType.CROSSES_EDGE,
        )

    @property
    def message(self) -> str:
        """Human-readable description of the classification."""
        if self.conflict_type == PanelConflictType.INSIDE_SAFE:
            return f"Safely centered ({self.distance:.1f}cm from edge)"
        if self.conflict_type == PanelConflictType.TOO_CLOSE_TO_EDGE:
            return f"Too close to edge ({self.distance:.1f}cm)"
        if self.conflict_type == PanelConflictType.CROSSES_EDGE:
            return f"On panel edge ({self.distance:.1f}cm away) - BAD!"
        return ""

    @property
    def badge(self) -> str:
        """Short status label used in reports."""
        return {
            PanelConflictType.NONE: "",
            PanelConflictType.INSIDE_SAFE: "✓ Safe",
            PanelConflictType.TOO_CLOSE_TO_EDGE: "⚠ Close",
            PanelConflictType.CROSSES_EDGE: "✗ Edge",
        }[self.conflict_type]


@dataclass(frozen=True)
class GapConflict:
    """Classification of the peephole against the gap holding its center.

    ``gap_index`` is the index of the gap (gap i lies below panel i), or
    None when the center is not inside any gap.
    """

    conflict_type: GapConflictType = GapConflictType.NONE
    gap_index: int | None = None
    distance: float | None = None

    @property
    def message(self) -> str:
        if self.conflict_type == GapConflictType.GAP_SAFE:
            return f"In gap between panels ({self.distance:.1f}cm clearance)"
        if self.conflict_type == GapConflictType.GAP_TOO_CLOSE:
            return f"Too close to panel edge in gap ({self.distance:.1f}cm)"
        return ""


@dataclass(frozen=True)
class PeepholeCoordinates:
    """Reporting coordinates of the peephole center."""

    x: float
    from_top: float
    from_bottom: float


@dataclass(frozen=True)
class PeepholeAnalysis:
    """Resolved peephole position and its conflict classification.

    Attributes:
        diameter: Peephole diameter.
        resolved_top: Top of the peephole measured from the door top.
        in_gap: True when the peephole sits in a gap between panels.
        source: How the position was obtained.
        panel_conflicts: One classification per panel, top to bottom.
        gap_conflict: Classification against the gap holding the center.
        coordinates: Center coordinates for reporting.
        ideal_center: Ergonomic ideal center (distance from top), set only
            when auto placement ran.
    """

    diameter: float
    resolved_top: float
    in_gap: bool
    source: PlacementSource
    panel_conflicts: tuple[PanelConflict, ...]
    gap_conflict: GapConflict
    coordinates: PeepholeCoordinates
    ideal_center: float | None = None

    @property
    def center(self) -> float:
        return self.resolved_top + self.diameter / 2

    @property
    def bottom(self) -> float:
        return self.resolved_top + self.diameter

    @property
    def has_conflict(self) -> bool:
        """True if any panel or gap classification needs attention."""
        return any(c.is_conflict for c in self.panel_conflicts) or (
            self.gap_conflict.conflict_type == GapConflictType.GAP_TOO_CLOSE
        )
