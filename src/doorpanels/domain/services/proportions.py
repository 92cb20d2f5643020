"""Proportion weight generation for panel heights.

This module produces the relative height weights for each panel from a
panel count and a proportion type, and normalizes them into fractional
shares of the height available for panels.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..value_objects import ProportionType
from .constants import MAX_UNSCALED_PANELS, MIN_WEIGHT, PHI

__all__ = [
    "PROPORTION_DESCRIPTIONS",
    "describe_proportion",
    "generate_weights",
    "normalize_weights",
]

# Rescale point for long Fibonacci runs, well below float overflow
_RESCALE_AT = 1e200


PROPORTION_DESCRIPTIONS: dict[ProportionType, str] = {
    ProportionType.EQUAL: "All panels same height",
    ProportionType.GOLDEN: "Golden progression (1, φ, φ², φ³, ...)",
    ProportionType.CLASSIC: "Symmetric proportions (larger in middle)",
    ProportionType.REVERSE: "Reverse golden progression (largest at top)",
    ProportionType.FIBONACCI: "Fibonacci sequence (1, 1, 2, 3, 5, 8, ...)",
}


def _coerce_type(proportion_type: ProportionType | str) -> ProportionType | None:
    """Map a type name to ProportionType, or None when unknown."""
    if isinstance(proportion_type, ProportionType):
        return proportion_type
    try:
        return ProportionType(str(proportion_type).lower())
    except ValueError:
        return None


def describe_proportion(proportion_type: ProportionType | str) -> str:
    """Return the human-readable description of a proportion type.

    Unknown types yield an empty string.
    """
    resolved = _coerce_type(proportion_type)
    if resolved is None:
        return ""
    return PROPORTION_DESCRIPTIONS[resolved]


def _scaled_to_unit(weights: list[float]) -> list[float]:
    """Divide by the largest weight, keeping every entry positive."""
    largest = max(weights)
    return [max(w / largest, MIN_WEIGHT) for w in weights]


def _golden(count: int) -> list[float]:
    if count <= MAX_UNSCALED_PANELS:
        return [PHI**i for i in range(count)]
    # φ^(i - (n-1)) has the same shares as φ^i without overflowing
    return [max(PHI ** (i - count + 1), MIN_WEIGHT) for i in range(count)]


def _fibonacci(count: int) -> list[float]:
    scaled = count > MAX_UNSCALED_PANELS
    sequence = [1.0, 1.0]
    for i in range(2, count):
        sequence.append(sequence[i - 1] + sequence[i - 2])
        if scaled and sequence[i] > _RESCALE_AT:
            sequence = _scaled_to_unit(sequence)
    if scaled:
        sequence = _scaled_to_unit(sequence)
    return sequence[:count]


def _classic(count: int) -> list[float]:
    if count == 1:
        return [1.0]
    if count == 2:
        # Deliberately asymmetric: a short top panel over a tall one
        return [1.0, 2.0]
    return [float(min(i, count - 1 - i) + 1) for i in range(count)]


def generate_weights(
    count: int,
    proportion_type: ProportionType | str,
) -> list[float]:
    """Generate unnormalized height weights for ``count`` panels.

    Sequences by type:
    - equal: 1, 1, 1, ...
    - golden: φ^0, φ^1, ..., φ^(n-1)
    - reverse: φ^(n-1), ..., φ, 1
    - classic: symmetric min(i, n-1-i) + 1 (special cases n=1 and n=2)
    - fibonacci: 1, 1, 2, 3, 5, ...

    Unknown types fall back to equal weights. A count below one yields
    the single weight [1]. Past MAX_UNSCALED_PANELS the golden, reverse
    and fibonacci sequences are divided by their largest term so every
    weight stays finite and positive.

    Args:
        count: Number of panels.
        proportion_type: Proportion type or its string name.

    Returns:
        List of ``max(count, 1)`` positive weights.

    Example:
        >>> generate_weights(5, ProportionType.CLASSIC)
        [1.0, 2.0, 3.0, 2.0, 1.0]
    """
    if count < 1:
        return [1.0]

    resolved = _coerce_type(proportion_type)

    if resolved == ProportionType.GOLDEN:
        return _golden(count)
    if resolved == ProportionType.REVERSE:
        return _golden(count)[::-1]
    if resolved == ProportionType.CLASSIC:
        return _classic(count)
    if resolved == ProportionType.FIBONACCI:
        return _fibonacci(count)
    return [1.0] * count


def normalize_weights(weights: Sequence[float]) -> list[float]:
    """Scale weights so they sum to one.

    An empty or non-positive total yields equal shares, so the result can
    always be used to distribute height.
    """
    if not weights:
        return [1.0]
    total = sum(weights)
    if total <= 0:
        return [1.0 / len(weights)] * len(weights)
    return [w / total for w in weights]
