"""Door, spacing and proportion value objects."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

# Golden ratio, duplicated from services.constants to keep value objects
# free of service imports.
_PHI = (1 + math.sqrt(5)) / 2


class ProportionType(str, Enum):
    """Proportional sequences used to distribute panel heights.

    Attributes:
        EQUAL: All panels the same height.
        GOLDEN: Golden progression 1, φ, φ², ... (largest at the bottom).
        REVERSE: Reverse golden progression (largest at the top).
        CLASSIC: Symmetric pattern, larger in the middle.
        FIBONACCI: Fibonacci sequence 1, 1, 2, 3, 5, ...
    """

    EQUAL = "equal"
    GOLDEN = "golden"
    REVERSE = "reverse"
    CLASSIC = "classic"
    FIBONACCI = "fibonacci"


@dataclass(frozen=True)
class DoorSpec:
    """Outer door dimensions, in one consistent linear unit.

    The engine is total over its inputs, so degenerate dimensions are
    carried through rather than rejected here. Validation of user input
    happens in the configuration layer.
    """

    width: float
    height: float

    @property
    def area(self) -> float:
        """Door face area (width x height)."""
        return self.width * self.height


@dataclass(frozen=True)
class SpacingConfig:
    """Edge and gap spacing as entered, plus the auto-calculation switch.

    Attributes:
        edge_distance: Margin between the door edge and the panel region.
        panel_gap: Vertical gap between consecutive panels.
        auto_calculate: Solve spacing from ``target_ratio`` instead of
            using the manual values.
        target_ratio: Desired ratio of panel area to negative space.
    """

    edge_distance: float = 15.0
    panel_gap: float = 10.0
    auto_calculate: bool = False
    target_ratio: float = _PHI


@dataclass(frozen=True)
class ProportionSpec:
    """Panel count and the proportional sequence to apply.

    ``proportion_type`` accepts a plain string as well; unknown names
    behave like ``equal``.
    """

    panel_count: int = 2
    proportion_type: ProportionType | str = ProportionType.GOLDEN
