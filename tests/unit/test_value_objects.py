"""Unit tests for door panel value objects."""

import pytest

from doorpanels.domain.value_objects import (
    DoorSpec,
    EffectiveSpacing,
    GapConflict,
    GapConflictType,
    GapPosition,
    PanelConflict,
    PanelConflictType,
    PanelLayout,
    PanelPosition,
    PeepholeAnalysis,
    PeepholeCoordinates,
    PeepholeSpec,
    PlacementSource,
    ProportionSpec,
    ProportionType,
    SpacingConfig,
    SpacingSource,
    gaps_between,
)


class TestDoorSpec:
    """Tests for DoorSpec."""

    def test_area(self) -> None:
        assert DoorSpec(width=103.0, height=201.0).area == pytest.approx(20703.0)

    def test_is_immutable(self) -> None:
        door = DoorSpec(width=103.0, height=201.0)
        with pytest.raises(AttributeError):
            door.width = 90.0  # type: ignore[misc]

    def test_degenerate_dimensions_are_accepted(self) -> None:
        """Validation happens in the configuration layer, not here."""
        door = DoorSpec(width=0.0, height=-5.0)
        assert door.area == 0.0


class TestDefaults:
    """Tests for default values of the input value objects."""

    def test_spacing_defaults(self) -> None:
        spacing = SpacingConfig()
        assert spacing.edge_distance == 15.0
        assert spacing.panel_gap == 10.0
        assert spacing.auto_calculate is False
        assert spacing.target_ratio == pytest.approx(1.6180339887)

    def test_proportion_defaults(self) -> None:
        proportion = ProportionSpec()
        assert proportion.panel_count == 2
        assert proportion.proportion_type == ProportionType.GOLDEN

    def test_peephole_defaults(self) -> None:
        peephole = PeepholeSpec()
        assert peephole.diameter == 6.0
        assert peephole.distance_from_top == 45.0
        assert peephole.auto_center is False
        assert peephole.min_edge_distance == 10.0
        assert peephole.radius == 3.0

    def test_proportion_type_is_string_enum(self) -> None:
        assert ProportionType("fibonacci") == ProportionType.FIBONACCI
        assert ProportionType.CLASSIC == "classic"


class TestEffectiveSpacing:
    """Tests for EffectiveSpacing source flags."""

    @pytest.mark.parametrize(
        "source,auto,fallback",
        [
            (SpacingSource.MANUAL, False, False),
            (SpacingSource.SOLVED, True, False),
            (SpacingSource.FALLBACK, True, True),
        ],
    )
    def test_flags(self, source: SpacingSource, auto: bool, fallback: bool) -> None:
        spacing = EffectiveSpacing(edge=10.0, gap=5.0, source=source)
        assert spacing.auto_calculated is auto
        assert spacing.used_fallback is fallback


class TestPositions:
    """Tests for panel and gap positions."""

    def test_panel_height_and_center(self) -> None:
        panel = PanelPosition(top=15.0, bottom=75.0)
        assert panel.height == 60.0
        assert panel.center == 45.0

    def test_gap_height_and_center(self) -> None:
        gap = GapPosition(index=0, top=75.0, bottom=85.0)
        assert gap.height == 10.0
        assert gap.center == 80.0

    def test_layout_derives_gaps_between_panels(self) -> None:
        layout = PanelLayout(
            positions=(
                PanelPosition(15.0, 50.0),
                PanelPosition(60.0, 100.0),
                PanelPosition(110.0, 186.0),
            ),
            panel_width=73.0,
            available_width=73.0,
            available_height=171.0,
            available_height_for_panels=151.0,
            total_used_height=171.0,
            fits=True,
        )

        assert layout.heights == (35.0, 40.0, 76.0)
        assert layout.gaps == (
            GapPosition(index=0, top=50.0, bottom=60.0),
            GapPosition(index=1, top=100.0, bottom=110.0),
        )

    def test_single_panel_has_no_gaps(self) -> None:
        layout = PanelLayout(
            positions=(PanelPosition(15.0, 186.0),),
            panel_width=73.0,
            available_width=73.0,
            available_height=171.0,
            available_height_for_panels=171.0,
            total_used_height=171.0,
            fits=True,
        )
        assert layout.gaps == ()

    def test_gaps_between_accepts_a_plain_list(self) -> None:
        positions = [PanelPosition(15.0, 50.0), PanelPosition(60.0, 186.0)]

        assert gaps_between(positions) == (GapPosition(index=0, top=50.0, bottom=60.0),)
        assert gaps_between(positions[:1]) == ()


class TestConflicts:
    """Tests for conflict messages and badges."""

    def test_inside_safe_message(self) -> None:
        conflict = PanelConflict(0, PanelConflictType.INSIDE_SAFE, 25.5)
        assert conflict.message == "Safely centered (25.5cm from edge)"
        assert conflict.badge == "✓ Safe"
        assert conflict.is_conflict is False

    def test_too_close_message(self) -> None:
        conflict = PanelConflict(0, PanelConflictType.TOO_CLOSE_TO_EDGE, 3.0)
        assert conflict.message == "Too close to edge (3.0cm)"
        assert conflict.badge == "⚠ Close"
        assert conflict.is_conflict is True

    def test_crosses_edge_message(self) -> None:
        conflict = PanelConflict(1, PanelConflictType.CROSSES_EDGE, 0.5)
        assert conflict.message == "On panel edge (0.5cm away) - BAD!"
        assert conflict.badge == "✗ Edge"
        assert conflict.is_conflict is True

    def test_none_has_empty_message(self) -> None:
        conflict = PanelConflict(1, PanelConflictType.NONE)
        assert conflict.message == ""
        assert conflict.badge == ""
        assert conflict.distance is None

    def test_gap_messages(self) -> None:
        assert (
            GapConflict(GapConflictType.GAP_SAFE, 0, 4.0).message
            == "In gap between panels (4.0cm clearance)"
        )
        assert (
            GapConflict(GapConflictType.GAP_TOO_CLOSE, 0, 1.5).message
            == "Too close to panel edge in gap (1.5cm)"
        )
        assert GapConflict().message == ""


class TestPeepholeAnalysis:
    """Tests for PeepholeAnalysis derived properties."""

    def _analysis(
        self,
        panel_conflicts: tuple[PanelConflict, ...],
        gap_conflict: GapConflict | None = None,
    ) -> PeepholeAnalysis:
        return PeepholeAnalysis(
            diameter=6.0,
            resolved_top=45.0,
            in_gap=False,
            source=PlacementSource.FIXED,
            panel_conflicts=panel_conflicts,
            gap_conflict=gap_conflict or GapConflict(),
            coordinates=PeepholeCoordinates(x=51.5, from_top=48.0, from_bottom=153.0),
        )

    def test_center_and_bottom(self) -> None:
        analysis = self._analysis(())
        assert analysis.center == 48.0
        assert analysis.bottom == 51.0

    def test_no_conflict_when_safe(self) -> None:
        analysis = self._analysis(
            (PanelConflict(0, PanelConflictType.INSIDE_SAFE, 25.0),)
        )
        assert analysis.has_conflict is False

    def test_panel_conflict_counts(self) -> None:
        analysis = self._analysis(
            (PanelConflict(0, PanelConflictType.CROSSES_EDGE, 0.5),)
        )
        assert analysis.has_conflict is True

    def test_gap_too_close_counts(self) -> None:
        analysis = self._analysis(
            (), GapConflict(GapConflictType.GAP_TOO_CLOSE, 0, 1.0)
        )
        assert analysis.has_conflict is True
