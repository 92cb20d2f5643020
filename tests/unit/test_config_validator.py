"""Unit tests for validation results and layout advisory checks."""

from typing import Any

import pytest

from doorpanels.application.config import (
    DoorPanelConfiguration,
    ValidationResult,
    check_layout_advisories,
    check_peephole_advisories,
    config_to_layout_input,
    validate_config,
)
from doorpanels.domain import compute_layout


def make_config(**sections: Any) -> DoorPanelConfiguration:
    data: dict[str, Any] = {
        "schema_version": "1.0",
        "door": {"width": 103, "height": 201},
    }
    data.update(sections)
    return DoorPanelConfiguration.model_validate(data)


def warning_paths(result: ValidationResult) -> list[str]:
    return [w.path for w in result.warnings]


class TestValidationResult:
    """Tests for ValidationResult bookkeeping."""

    def test_empty_is_valid(self) -> None:
        result = ValidationResult()
        assert result.is_valid is True
        assert result.has_warnings is False
        assert result.exit_code == 0

    def test_warnings_only(self) -> None:
        result = ValidationResult().add_warning("spacing", "Too tight")
        assert result.is_valid is True
        assert result.exit_code == 2

    def test_errors_win(self) -> None:
        result = ValidationResult().add_warning("spacing", "w").add_error("door", "e", 5)
        assert result.is_valid is False
        assert result.exit_code == 1
        assert result.errors[0].value == 5

    def test_merge(self) -> None:
        result = ValidationResult().add_warning("a", "one")
        result.merge(ValidationResult().add_error("b", "two"))
        assert len(result.warnings) == 1
        assert len(result.errors) == 1


class TestLayoutAdvisories:
    """Tests for check_layout_advisories."""

    def _check(self, config: DoorPanelConfiguration) -> ValidationResult:
        layout = compute_layout(config_to_layout_input(config))
        return check_layout_advisories(config, layout)

    def test_clean_layout(self) -> None:
        result = self._check(make_config())
        assert result.errors == []
        assert result.warnings == []

    def test_edge_wider_than_door_is_an_error(self) -> None:
        config = make_config(
            door={"width": 40, "height": 201},
            spacing={"edge_distance": 25, "panel_gap": 5},
        )
        result = self._check(config)

        assert result.is_valid is False
        assert result.errors[0].path == "spacing.edge_distance"
        assert result.errors[0].value == 25.0

    def test_overflow_warns(self) -> None:
        config = make_config(
            spacing={"edge_distance": 15, "panel_gap": 50},
            proportion={"panel_count": 5, "type": "equal"},
        )
        result = self._check(config)

        assert result.is_valid is True
        assert "spacing" in warning_paths(result)
        assert "proportion.panel_count" in warning_paths(result)
        overflow = next(w for w in result.warnings if w.path == "spacing")
        assert "exceed the available height by 29.0" in overflow.message

    def test_fallback_warns(self) -> None:
        config = make_config(spacing={"auto_calculate": True, "target_ratio": 100})
        result = self._check(config)

        assert warning_paths(result) == ["spacing.target_ratio"]
        assert "fallback edge" in result.warnings[0].message

    def test_solved_spacing_is_clean(self) -> None:
        result = self._check(make_config(spacing={"auto_calculate": True}))
        assert result.warnings == []


class TestPeepholeAdvisories:
    """Tests for check_peephole_advisories."""

    def _check(self, config: DoorPanelConfiguration) -> ValidationResult:
        layout = compute_layout(config_to_layout_input(config))
        return check_peephole_advisories(config, layout)

    def test_no_peephole(self) -> None:
        result = self._check(make_config())
        assert result.warnings == []

    def test_peephole_on_panel_edge(self) -> None:
        result = self._check(make_config(peephole={"distance_from_top": 74}))
        messages = [w.message for w in result.warnings]

        assert any(m.startswith("Panel 1: On panel edge") for m in messages)
        assert any("Too close to panel edge in gap" in m for m in messages)
        assert "peephole.distance_from_top" in warning_paths(result)

    def test_auto_center_in_band_is_clean(self) -> None:
        config = make_config(peephole={"auto_center": True, "min_edge_distance": 2})
        assert self._check(config).warnings == []

    def test_ideal_fallback_warns(self) -> None:
        config = make_config(peephole={"auto_center": True, "min_edge_distance": 100})
        result = self._check(config)

        assert "peephole.auto_center" in warning_paths(result)

    @pytest.mark.parametrize("top", [5.0, 100.0])
    def test_outside_viewing_band_warns(self, top: float) -> None:
        # Peephole centers 8 and 103 from the top sit 193 and 98 above the floor
        config = make_config(
            peephole={"distance_from_top": top, "min_edge_distance": 0}
        )
        result = self._check(config)

        assert "peephole.distance_from_top" in warning_paths(result)


class TestValidateConfig:
    """Tests for validate_config."""

    def test_minimal_config_is_clean(self) -> None:
        result = validate_config(make_config())
        assert result.exit_code == 0

    def test_combines_layout_and_peephole_checks(self) -> None:
        config = make_config(
            spacing={"edge_distance": 15, "panel_gap": 50},
            proportion={"panel_count": 5, "type": "equal"},
            peephole={"auto_center": True, "min_edge_distance": 30},
        )
        result = validate_config(config)

        paths = warning_paths(result)
        assert "spacing" in paths
        assert "peephole.auto_center" in paths
        assert result.exit_code == 2
