"""Pytest configuration and shared fixtures for door panel tests."""

from __future__ import annotations

import pytest

from doorpanels.domain import (
    DoorSpec,
    LayoutInput,
    LayoutResult,
    PeepholeSpec,
    ProportionSpec,
    SpacingConfig,
    compute_layout,
)


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: end-to-end CLI and API tests")
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared layout fixtures
# =============================================================================


@pytest.fixture
def standard_door() -> DoorSpec:
    """A 103 x 201 door, the calculator's default size."""
    return DoorSpec(width=103.0, height=201.0)


@pytest.fixture
def golden_input(standard_door: DoorSpec) -> LayoutInput:
    """Two golden panels with manual 15/10 spacing and no peephole."""
    return LayoutInput(
        door=standard_door,
        spacing=SpacingConfig(edge_distance=15.0, panel_gap=10.0),
        proportion=ProportionSpec(panel_count=2, proportion_type="golden"),
    )


@pytest.fixture
def golden_result(golden_input: LayoutInput) -> LayoutResult:
    """Layout computed from ``golden_input``."""
    return compute_layout(golden_input)


@pytest.fixture
def golden_with_peephole(golden_input: LayoutInput) -> LayoutResult:
    """Golden layout with the default fixed peephole (top 45, diameter 6)."""
    return compute_layout(
        LayoutInput(
            door=golden_input.door,
            spacing=golden_input.spacing,
            proportion=golden_input.proportion,
            peephole=PeepholeSpec(),
        )
    )
