"""Unit tests for proportion weight generation."""

import math

import pytest

from doorpanels.domain.services import (
    PHI,
    PROPORTION_DESCRIPTIONS,
    describe_proportion,
    generate_weights,
    normalize_weights,
)
from doorpanels.domain.value_objects import ProportionType


class TestGenerateWeights:
    """Tests for generate_weights."""

    def test_equal(self) -> None:
        assert generate_weights(4, ProportionType.EQUAL) == [1.0, 1.0, 1.0, 1.0]

    def test_golden_increases_downward(self) -> None:
        weights = generate_weights(3, ProportionType.GOLDEN)
        assert weights == pytest.approx([1.0, PHI, PHI**2])

    def test_reverse_golden_decreases_downward(self) -> None:
        weights = generate_weights(3, ProportionType.REVERSE)
        assert weights == pytest.approx([PHI**2, PHI, 1.0])

    def test_golden_successive_ratio_is_phi(self) -> None:
        weights = generate_weights(6, ProportionType.GOLDEN)
        for upper, lower in zip(weights, weights[1:]):
            assert lower / upper == pytest.approx(PHI)

    @pytest.mark.parametrize(
        "count,expected",
        [
            (1, [1.0]),
            (2, [1.0, 2.0]),
            (3, [1.0, 2.0, 1.0]),
            (4, [1.0, 2.0, 2.0, 1.0]),
            (5, [1.0, 2.0, 3.0, 2.0, 1.0]),
        ],
    )
    def test_classic(self, count: int, expected: list[float]) -> None:
        assert generate_weights(count, ProportionType.CLASSIC) == expected

    def test_fibonacci(self) -> None:
        assert generate_weights(6, ProportionType.FIBONACCI) == [
            1.0,
            1.0,
            2.0,
            3.0,
            5.0,
            8.0,
        ]

    def test_fibonacci_single_panel(self) -> None:
        assert generate_weights(1, ProportionType.FIBONACCI) == [1.0]

    def test_accepts_type_name(self) -> None:
        assert generate_weights(5, "classic") == [1.0, 2.0, 3.0, 2.0, 1.0]

    def test_unknown_type_falls_back_to_equal(self) -> None:
        assert generate_weights(3, "spiral") == [1.0, 1.0, 1.0]

    @pytest.mark.parametrize("count", [0, -3])
    def test_count_below_one_yields_single_weight(self, count: int) -> None:
        assert generate_weights(count, ProportionType.GOLDEN) == [1.0]

    @pytest.mark.parametrize("proportion_type", list(ProportionType))
    def test_length_matches_count(self, proportion_type: ProportionType) -> None:
        assert len(generate_weights(7, proportion_type)) == 7

    @pytest.mark.parametrize(
        "proportion_type",
        [ProportionType.GOLDEN, ProportionType.REVERSE, ProportionType.FIBONACCI],
    )
    @pytest.mark.parametrize("count", [1001, 1500, 5000])
    def test_long_progressions_stay_finite_and_positive(
        self, proportion_type: ProportionType, count: int
    ) -> None:
        weights = generate_weights(count, proportion_type)
        shares = normalize_weights(weights)

        assert len(weights) == count
        assert all(math.isfinite(w) and w > 0 for w in weights)
        assert all(s > 0 for s in shares)
        assert sum(shares) == pytest.approx(1.0)

    def test_rescaled_golden_keeps_successive_ratio(self) -> None:
        weights = generate_weights(2000, ProportionType.GOLDEN)

        assert weights[-1] == 1.0
        assert weights[-2] == pytest.approx(1 / PHI)
        assert weights[-1] / weights[-10] == pytest.approx(PHI**9)

    def test_rescaled_fibonacci_keeps_successive_ratio(self) -> None:
        weights = generate_weights(3000, ProportionType.FIBONACCI)

        assert max(weights) == 1.0
        assert weights[-1] / weights[-2] == pytest.approx(PHI)

    def test_counts_up_to_limit_are_not_rescaled(self) -> None:
        weights = generate_weights(1000, ProportionType.GOLDEN)
        assert weights[0] == 1.0
        assert weights[1] == pytest.approx(PHI)


class TestNormalizeWeights:
    """Tests for normalize_weights."""

    def test_sums_to_one(self) -> None:
        shares = normalize_weights([1.0, 2.0, 3.0, 2.0, 1.0])
        assert sum(shares) == pytest.approx(1.0)
        assert shares[2] == pytest.approx(3 / 9)

    def test_golden_pair(self) -> None:
        shares = normalize_weights([1.0, PHI])
        assert shares == pytest.approx([0.381966, 0.618034], abs=1e-6)

    def test_empty_yields_single_share(self) -> None:
        assert normalize_weights([]) == [1.0]

    def test_zero_total_yields_equal_shares(self) -> None:
        assert normalize_weights([0.0, 0.0]) == [0.5, 0.5]


class TestDescribeProportion:
    """Tests for proportion descriptions."""

    def test_every_type_is_described(self) -> None:
        assert set(PROPORTION_DESCRIPTIONS) == set(ProportionType)

    def test_describe_by_name(self) -> None:
        assert describe_proportion("equal") == "All panels same height"

    def test_unknown_type_is_empty(self) -> None:
        assert describe_proportion("spiral") == ""
