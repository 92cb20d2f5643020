"""Unit tests for the text report and JSON formatters."""

import json

import pytest

from doorpanels.domain import (
    DoorSpec,
    LayoutInput,
    LayoutResult,
    PeepholeSpec,
    ProportionSpec,
    ProportionType,
    SpacingConfig,
    compute_layout,
)
from doorpanels.infrastructure.formatters import (
    JsonLayoutFormatter,
    LayoutReportFormatter,
    layout_result_to_dict,
)


@pytest.fixture
def overflow_result(standard_door: DoorSpec) -> LayoutResult:
    return compute_layout(
        LayoutInput(
            door=standard_door,
            spacing=SpacingConfig(edge_distance=15.0, panel_gap=50.0),
            proportion=ProportionSpec(5, ProportionType.EQUAL),
        )
    )


class TestLayoutReportFormatter:
    """Tests for LayoutReportFormatter."""

    def test_sections(self, golden_result: LayoutResult) -> None:
        report = LayoutReportFormatter().format(golden_result)

        assert report.startswith("DOOR PANEL LAYOUT")
        assert "PANEL SPECIFICATIONS" in report
        assert "SPACING" in report
        assert "VERIFICATION" in report
        assert "PEEPHOLE" not in report

    def test_panel_specifications(self, golden_result: LayoutResult) -> None:
        report = LayoutReportFormatter().format(golden_result)

        assert "Door: 103.0 x 201.0 cm" in report
        assert "Proportion: golden (2 panels)" in report
        assert "Panel width: 73.0 cm (all panels)" in report
        assert "  Panel 1: 61.5 cm" in report
        assert "  Panel 2: 99.5 cm" in report
        assert "Golden ratio (φ): 1.6180" in report
        assert "✓ All panels fit perfectly" in report
        assert "Source: manual" in report

    def test_overflow_verdict(self, overflow_result: LayoutResult) -> None:
        report = LayoutReportFormatter().format(overflow_result)
        assert "⚠ Panels don't fit - reduce panel count or gaps" in report

    def test_peephole_section_and_badge(self, golden_with_peephole: LayoutResult) -> None:
        report = LayoutReportFormatter().format(golden_with_peephole)

        assert "PEEPHOLE" in report
        assert "Placement: fixed" in report
        assert "✓ Safe" in report
        assert "Panel 1: Safely centered (25.5cm from edge)" in report

    def test_gap_placement_is_flagged(self, golden_input: LayoutInput) -> None:
        result = compute_layout(
            LayoutInput(
                door=golden_input.door,
                spacing=golden_input.spacing,
                proportion=golden_input.proportion,
                peephole=PeepholeSpec(
                    auto_center=True, prefer_gap_placement=True, min_edge_distance=1.0
                ),
            )
        )
        report = LayoutReportFormatter().format(result)

        assert "Placement: gap (in gap)" in report
        assert "Ideal center: 38.5 cm from top" in report

    def test_custom_unit_and_no_verification(self, golden_result: LayoutResult) -> None:
        report = LayoutReportFormatter(unit="in", show_verification=False).format(
            golden_result
        )

        assert "Door: 103.0 x 201.0 in" in report
        assert "VERIFICATION" not in report


class TestLayoutResultToDict:
    """Tests for layout_result_to_dict."""

    def test_structure(self, golden_result: LayoutResult) -> None:
        data = layout_result_to_dict(golden_result)

        assert data["door"] == {"width": 103.0, "height": 201.0}
        assert data["proportion"]["type"] == "golden"
        assert data["proportion"]["panel_count"] == 2
        assert data["spacing"]["source"] == "manual"
        assert data["layout"]["fits"] is True
        assert len(data["layout"]["panels"]) == 2
        assert data["layout"]["gaps"][0]["index"] == 0
        assert data["peephole"] is None

    def test_peephole(self, golden_with_peephole: LayoutResult) -> None:
        peephole = layout_result_to_dict(golden_with_peephole)["peephole"]

        assert peephole["source"] == "fixed"
        assert peephole["top"] == 45.0
        assert peephole["center"] == 48.0
        assert peephole["panel_conflicts"][0]["type"] == "inside_safe"
        assert peephole["gap_conflict"]["type"] == "none"
        assert peephole["has_conflict"] is False

    def test_infinite_ratio_becomes_none(self, standard_door: DoorSpec) -> None:
        result = compute_layout(
            LayoutInput(
                door=standard_door,
                spacing=SpacingConfig(auto_calculate=True, target_ratio=0.0),
            )
        )
        verification = layout_result_to_dict(result)["verification"]

        assert verification["ratio_error_pct"] is None
        assert verification["target_ratio"] == 0.0


class TestJsonLayoutFormatter:
    """Tests for JsonLayoutFormatter."""

    def test_output_is_strict_json(self, standard_door: DoorSpec) -> None:
        result = compute_layout(
            LayoutInput(
                door=standard_door,
                spacing=SpacingConfig(auto_calculate=True, target_ratio=0.0),
            )
        )
        text = JsonLayoutFormatter().format(result)

        data = json.loads(text, parse_constant=pytest.fail)
        assert data["spacing"]["source"] == "fallback"

    def test_indent(self, golden_result: LayoutResult) -> None:
        text = JsonLayoutFormatter(indent=4).format(golden_result)
        assert '\n    "door"' in text
