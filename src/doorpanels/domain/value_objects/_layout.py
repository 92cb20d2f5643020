"""Layout input and result value objects."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from ._door import DoorSpec, ProportionSpec, ProportionType, SpacingConfig
from ._peephole import PeepholeAnalysis, PeepholeSpec


class SpacingSource(str, Enum):
    """How the effective spacing was obtained.

    Attributes:
        MANUAL: Taken verbatim from the spacing configuration.
        SOLVED: Root of the area-ratio quadratic.
        FALLBACK: Deterministic fallback (5% of door height) after the
            quadratic had no usable root.
    """

    MANUAL = "manual"
    SOLVED = "solved"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class EffectiveSpacing:
    """Edge distance and panel gap actually used for the layout."""

    edge: float
    gap: float
    source: SpacingSource = SpacingSource.MANUAL

    @property
    def auto_calculated(self) -> bool:
        return self.source != SpacingSource.MANUAL

    @property
    def used_fallback(self) -> bool:
        return self.source == SpacingSource.FALLBACK


@dataclass(frozen=True)
class PanelPosition:
    """Vertical extent of one panel, measured from the door top."""

    top: float
    bottom: float

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def center(self) -> float:
        return (self.top + self.bottom) / 2


@dataclass(frozen=True)
class GapPosition:
    """Vertical extent of the gap between panel ``index`` and the next one."""

    index: int
    top: float
    bottom: float

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def center(self) -> float:
        return (self.top + self.bottom) / 2


@dataclass(frozen=True)
class PanelLayout:
    """Absolute panel geometry produced by the panel layout builder.

    Attributes:
        positions: Panels ordered top to bottom.
        panel_width: Width shared by every panel.
        available_width: Door width minus both edge margins.
        available_height: Door height minus both edge margins.
        available_height_for_panels: Height left for panels after gaps,
            clamped to zero.
        total_used_height: Sum of panel heights and gaps.
        fits: Whether panels and gaps stay inside the available height.
    """

    positions: tuple[PanelPosition, ...]
    panel_width: float
    available_width: float
    available_height: float
    available_height_for_panels: float
    total_used_height: float
    fits: bool

    @property
    def heights(self) -> tuple[float, ...]:
        return tuple(p.height for p in self.positions)

    @property
    def gaps(self) -> tuple[GapPosition, ...]:
        """Gaps between consecutive panels, top to bottom."""
        return gaps_between(self.positions)


def gaps_between(positions: Sequence[PanelPosition]) -> tuple[GapPosition, ...]:
    """Derive the gap between each pair of consecutive panels.

    Args:
        positions: Panels ordered top to bottom.

    Returns:
        One GapPosition per adjacent pair, indexed by the upper panel.
    """
    return tuple(
        GapPosition(index=i, top=upper.bottom, bottom=lower.top)
        for i, (upper, lower) in enumerate(zip(positions, positions[1:]))
    )


@dataclass(frozen=True)
class VerificationMetrics:
    """Area and ratio figures used to check the layout against the target.

    The negative-space decomposition splits the area not covered by
    panels into the border frame, the gaps, and whatever remains.
    """

    total_door_area: float
    total_panel_area: float
    negative_space_area: float
    actual_ratio: float
    target_ratio: float
    ratio_error_pct: float
    edge_area: float
    gap_area: float
    remainder_area: float


@dataclass(frozen=True)
class LayoutInput:
    """Immutable input snapshot for one computation pass."""

    door: DoorSpec
    spacing: SpacingConfig = field(default_factory=SpacingConfig)
    proportion: ProportionSpec = field(default_factory=ProportionSpec)
    peephole: PeepholeSpec | None = None


@dataclass(frozen=True)
class LayoutResult:
    """Aggregate output of one computation pass.

    This is the only artifact handed to formatters and exporters.
    """

    door: DoorSpec
    proportion_type: ProportionType | str
    spacing: EffectiveSpacing
    weights: tuple[float, ...]
    normalized_weights: tuple[float, ...]
    layout: PanelLayout
    verification: VerificationMetrics
    peephole: PeepholeAnalysis | None = None

    @property
    def panel_count(self) -> int:
        return len(self.layout.positions)

    @property
    def fits(self) -> bool:
        return self.layout.fits

    @property
    def panel_width(self) -> float:
        return self.layout.panel_width

    @property
    def panel_heights(self) -> tuple[float, ...]:
        return self.layout.heights
