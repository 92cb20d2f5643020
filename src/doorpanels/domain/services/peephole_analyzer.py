"""Peephole placement and conflict analysis.

This module resolves where a circular peephole goes on the door and how
it relates to every panel and gap. Placement is either fixed (the user
supplies the distance from the top) or searched automatically among
panel and gap centers, scored by distance from the ergonomic ideal.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from ..value_objects import (
    ConflictModel,
    DoorSpec,
    GapConflict,
    GapConflictType,
    GapPosition,
    PanelConflict,
    PanelConflictType,
    PanelPosition,
    PeepholeAnalysis,
    PeepholeCoordinates,
    PeepholeSpec,
    PlacementSource,
    gaps_between,
)
from .constants import PEEPHOLE_IDEAL_HEIGHT

__all__ = [
    "PeepholeAnalyzer",
    "analyze_peephole",
    "ideal_peephole_center",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Candidate:
    """An admissible peephole center inside a panel or a gap."""

    center: float
    source: PlacementSource
    index: int


def ideal_peephole_center(door: DoorSpec) -> float:
    """Ideal peephole center measured from the door top.

    The center of the 145-180 cm viewing band above the floor, expressed
    as distance from the top of the door.
    """
    return door.height - PEEPHOLE_IDEAL_HEIGHT


class PeepholeAnalyzer:
    """Resolves peephole placement and classifies conflicts.

    Conflict classification always runs once a position is known, whether
    it was fixed or found by the auto-placement search.

    Example:
        analyzer = PeepholeAnalyzer()
        analysis = analyzer.analyze(layout.positions, door, PeepholeSpec(auto_center=True))
    """

    def analyze(
        self,
        positions: Sequence[PanelPosition],
        door: DoorSpec,
        peephole: PeepholeSpec,
    ) -> PeepholeAnalysis:
        """Resolve the peephole position and classify it.

        Args:
            positions: Panel positions ordered top to bottom.
            door: Door dimensions.
            peephole: Peephole request.

        Returns:
            PeepholeAnalysis with the resolved position, per-panel
            conflicts, the gap conflict and reporting coordinates.
        """
        radius = peephole.diameter / 2
        gaps = gaps_between(positions)
        ideal_center: float | None = None

        if peephole.auto_center:
            ideal_center = ideal_peephole_center(door)
            candidate = self.find_best_position(positions, door, peephole)
            if candidate is None:
                logger.debug(
                    f"No admissible peephole candidate, using ideal center {ideal_center:.2f}"
                )
                center = ideal_center
                source = PlacementSource.IDEAL
            else:
                center = candidate.center
                source = candidate.source
            resolved_top = center - radius
        else:
            resolved_top = peephole.distance_from_top
            source = PlacementSource.FIXED

        panel_conflicts = tuple(
            self.classify_panel(i, panel, resolved_top, peephole)
            for i, panel in enumerate(positions)
        )
        gap_conflict = self.classify_gap(gaps, resolved_top, peephole)

        if source == PlacementSource.FIXED:
            in_gap = gap_conflict.conflict_type != GapConflictType.NONE
        else:
            in_gap = source == PlacementSource.GAP

        center = resolved_top + radius
        return PeepholeAnalysis(
            diameter=peephole.diameter,
            resolved_top=resolved_top,
            in_gap=in_gap,
            source=source,
            panel_conflicts=panel_conflicts,
            gap_conflict=gap_conflict,
            coordinates=PeepholeCoordinates(
                x=door.width / 2,
                from_top=center,
                from_bottom=door.height - center,
            ),
            ideal_center=ideal_center,
        )

    def find_best_position(
        self,
        positions: Sequence[PanelPosition],
        door: DoorSpec,
        peephole: PeepholeSpec,
    ) -> _Candidate | None:
        """Pick the admissible center closest to the ideal position.

        Panel candidates are preferred unless ``prefer_gap_placement`` is
        set, in which case gap candidates are tried first. Within a set,
        ties go to the topmost candidate.

        Returns:
            The chosen candidate, or None when neither panels nor gaps
            admit the peephole.
        """
        ideal = ideal_peephole_center(door)
        panel_candidates = [
            _Candidate(center=panel.center, source=PlacementSource.PANEL, index=i)
            for i, panel in enumerate(positions)
            if self._admits(panel.top, panel.bottom, peephole)
        ]
        gap_candidates = [
            _Candidate(center=gap.center, source=PlacementSource.GAP, index=gap.index)
            for gap in gaps_between(positions)
            if self._admits(gap.top, gap.bottom, peephole)
        ]
        logger.debug(
            f"Peephole candidates: {len(panel_candidates)} panel, "
            f"{len(gap_candidates)} gap, ideal center {ideal:.2f}"
        )

        if peephole.prefer_gap_placement:
            ordered = (gap_candidates, panel_candidates)
        else:
            ordered = (panel_candidates, gap_candidates)

        for candidates in ordered:
            if candidates:
                return min(candidates, key=lambda c: abs(c.center - ideal))
        return None

    def classify_panel(
        self,
        index: int,
        panel: PanelPosition,
        peephole_top: float,
        peephole: PeepholeSpec,
    ) -> PanelConflict:
        """Classify the peephole against one panel.

        The peephole is contained when its span lies within the panel.
        Clearance is measured from the rim in the radius-aware model and
        from the center in the legacy model. A span that overlaps the
        panel without being contained crosses an edge.
        """
        radius = peephole.diameter / 2
        peephole_bottom = peephole_top + peephole.diameter
        center = peephole_top + radius

        if peephole_top >= panel.top and peephole_bottom <= panel.bottom:
            if peephole.conflict_model == ConflictModel.LEGACY:
                clearance = min(center - panel.top, panel.bottom - center)
            else:
                clearance = min(peephole_top - panel.top, panel.bottom - peephole_bottom)
            conflict_type = (
                PanelConflictType.TOO_CLOSE_TO_EDGE
                if clearance < peephole.min_edge_distance
                else PanelConflictType.INSIDE_SAFE
            )
            return PanelConflict(index, conflict_type, clearance)

        if peephole_top < panel.bottom and peephole_bottom > panel.top:
            distance = min(abs(center - panel.top), abs(center - panel.bottom))
            return PanelConflict(index, PanelConflictType.CROSSES_EDGE, distance)

        return PanelConflict(index, PanelConflictType.NONE)

    def classify_gap(
        self,
        gaps: Sequence[GapPosition],
        peephole_top: float,
        peephole: PeepholeSpec,
    ) -> GapConflict:
        """Classify the peephole against the gap holding its center.

        Only a center strictly inside a gap counts. Clearance is the
        smaller distance to the two bounding panel edges.
        """
        radius = peephole.diameter / 2
        center = peephole_top + radius

        for gap in gaps:
            if not gap.top < center < gap.bottom:
                continue
            if peephole.conflict_model == ConflictModel.LEGACY:
                clearance = min(center - gap.top, gap.bottom - center)
            else:
                clearance = min(
                    peephole_top - gap.top,
                    gap.bottom - (peephole_top + peephole.diameter),
                )
            conflict_type = (
                GapConflictType.GAP_TOO_CLOSE
                if clearance < peephole.min_edge_distance
                else GapConflictType.GAP_SAFE
            )
            return GapConflict(conflict_type, gap.index, clearance)

        return GapConflict()

    @staticmethod
    def _admits(top: float, bottom: float, peephole: PeepholeSpec) -> bool:
        """Whether a centered peephole keeps the minimum clearance."""
        center = (top + bottom) / 2
        radius = peephole.diameter / 2
        return (
            center - radius - top >= peephole.min_edge_distance
            and bottom - (center + radius) >= peephole.min_edge_distance
        )


def analyze_peephole(
    positions: Sequence[PanelPosition],
    door: DoorSpec,
    peephole: PeepholeSpec,
) -> PeepholeAnalysis:
    """Analyze peephole placement; see PeepholeAnalyzer.analyze."""
    return PeepholeAnalyzer().analyze(positions, door, peephole)
