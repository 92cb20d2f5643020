"""Validation structures and layout advisory checks.

This module provides validation result structures and the advisory
checks run on top of schema validation. The checks compute the layout
once and report what a user should look at before building the door:
overflow, collapsed panels, spacing fallbacks and peephole conflicts.
"""

from dataclasses import dataclass, field
from typing import Any

from doorpanels.application.config.adapter import config_to_layout_input
from doorpanels.application.config.schema import DoorPanelConfiguration
from doorpanels.domain.services import compute_layout
from doorpanels.domain.services.constants import (
    PEEPHOLE_BAND_MAX_HEIGHT,
    PEEPHOLE_BAND_MIN_HEIGHT,
)
from doorpanels.domain.value_objects import (
    GapConflictType,
    LayoutResult,
    PlacementSource,
)

# Ratio deviation (percent) above which an auto-spacing layout is flagged
MAX_RATIO_ERROR_PCT: float = 5.0


@dataclass
class ValidationError:
    """Represents a blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "spacing.edge_distance")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """Represents a non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the configuration has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """CLI exit code: 1 on errors, 2 on warnings only, 0 when clean."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another ValidationResult into this one."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def check_layout_advisories(
    config: DoorPanelConfiguration, layout: LayoutResult
) -> ValidationResult:
    """Check the computed panel layout for unusable or suspicious geometry.

    Args:
        config: The validated configuration
        layout: The layout computed from it

    Returns:
        ValidationResult with errors for geometry that cannot be built and
        warnings for overflow, collapsed panels and spacing fallbacks
    """
    result = ValidationResult()

    if layout.panel_width <= 0:
        result.add_error(
            path="spacing.edge_distance",
            message=(
                f"Edge distance ({layout.spacing.edge:.1f}) leaves no width for "
                f"panels on a {config.door.width:.1f} wide door"
            ),
            value=layout.spacing.edge,
        )

    if not layout.fits:
        overflow = layout.layout.total_used_height - layout.layout.available_height
        result.add_warning(
            path="spacing",
            message=(
                f"Panels and gaps exceed the available height by {overflow:.1f}"
            ),
            suggestion="Reduce the edge distance, the panel gap or the panel count",
        )

    if any(h <= 0 for h in layout.panel_heights):
        result.add_warning(
            path="proportion.panel_count",
            message="Spacing leaves no height for panels; panels collapse to zero height",
            suggestion="Reduce the panel gap or the panel count",
        )

    if layout.spacing.used_fallback:
        result.add_warning(
            path="spacing.target_ratio",
            message=(
                f"Target ratio {config.spacing.target_ratio:.3f} has no usable "
                f"spacing solution; fallback edge {layout.spacing.edge:.1f} used"
            ),
            suggestion="Choose a target ratio closer to the golden ratio",
        )
    elif (
        layout.spacing.auto_calculated
        and layout.verification.ratio_error_pct > MAX_RATIO_ERROR_PCT
    ):
        result.add_warning(
            path="spacing.target_ratio",
            message=(
                f"Achieved ratio {layout.verification.actual_ratio:.3f} deviates "
                f"{layout.verification.ratio_error_pct:.1f}% from the target"
            ),
        )

    return result


def check_peephole_advisories(
    config: DoorPanelConfiguration, layout: LayoutResult
) -> ValidationResult:
    """Check the resolved peephole against panels, gaps and viewing height."""
    result = ValidationResult()
    analysis = layout.peephole
    if analysis is None:
        return result

    for conflict in analysis.panel_conflicts:
        if conflict.is_conflict:
            result.add_warning(
                path="peephole",
                message=f"Panel {conflict.panel_index + 1}: {conflict.message}",
                suggestion="Enable auto_center or move the peephole",
            )

    if analysis.gap_conflict.conflict_type == GapConflictType.GAP_TOO_CLOSE:
        result.add_warning(
            path="peephole",
            message=analysis.gap_conflict.message,
            suggestion="Increase the panel gap or move the peephole",
        )

    if analysis.source == PlacementSource.IDEAL:
        result.add_warning(
            path="peephole.auto_center",
            message=(
                "No panel or gap leaves enough clearance; peephole placed at "
                "the ideal viewing height"
            ),
            suggestion="Reduce min_edge_distance or the panel count",
        )

    height_from_floor = analysis.coordinates.from_bottom
    if not PEEPHOLE_BAND_MIN_HEIGHT <= height_from_floor <= PEEPHOLE_BAND_MAX_HEIGHT:
        result.add_warning(
            path="peephole.distance_from_top",
            message=(
                f"Peephole center is {height_from_floor:.1f} above the floor, "
                f"outside the {PEEPHOLE_BAND_MIN_HEIGHT:g}-"
                f"{PEEPHOLE_BAND_MAX_HEIGHT:g} viewing band"
            ),
        )

    return result


def validate_config(config: DoorPanelConfiguration) -> ValidationResult:
    """Perform full validation of a door panel configuration.

    Structural validation is already done by Pydantic; this runs the
    layout engine once and adds the advisory checks.

    Args:
        config: A DoorPanelConfiguration instance (already validated)

    Returns:
        ValidationResult containing any errors or warnings
    """
    layout = compute_layout(config_to_layout_input(config))
    result = ValidationResult()
    result.merge(check_layout_advisories(config, layout))
    result.merge(check_peephole_advisories(config, layout))
    return result
