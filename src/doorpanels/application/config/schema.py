"""Pydantic configuration schema models for door panel layouts.

This module defines the schema for JSON-based door panel configuration
files. It uses Pydantic v2 for validation and serialization.

The ProportionType and ConflictModel enums are reused from the domain
layer so that configuration values map one-to-one onto engine inputs.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from doorpanels.domain.services.constants import DEFAULT_MIN_EDGE_DISTANCE, PHI
from doorpanels.domain.value_objects import ConflictModel, ProportionType

# Supported schema versions for configuration files
# Version 1.0: Door, spacing, proportion and peephole configuration
# Version 1.1: Added output configuration (format, file, preview width)
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0", "1.1"})

# Upper bound on the number of panels a configuration may request
MAX_PANEL_COUNT: int = 50


class DoorConfig(BaseModel):
    """Outer door dimensions.

    Attributes:
        width: Door width (must be positive, max 1000)
        height: Door height (must be positive, max 1000)
    """

    model_config = ConfigDict(extra="forbid")

    width: float = Field(..., gt=0, le=1000, description="Door width")
    height: float = Field(..., gt=0, le=1000, description="Door height")


class SpacingConfigSchema(BaseModel):
    """Edge and gap spacing configuration.

    When ``auto_calculate`` is enabled, ``edge_distance`` and ``panel_gap``
    are ignored and solved from ``target_ratio`` instead.

    Attributes:
        edge_distance: Margin between the door edge and the panel region
        panel_gap: Vertical gap between consecutive panels
        auto_calculate: Solve spacing from the target area ratio
        target_ratio: Desired ratio of panel area to negative space
    """

    model_config = ConfigDict(extra="forbid")

    edge_distance: float = Field(default=15.0, ge=0, description="Edge distance")
    panel_gap: float = Field(default=10.0, ge=0, description="Gap between panels")
    auto_calculate: bool = False
    target_ratio: float = Field(
        default=PHI, gt=0, le=100, description="Panel area / negative space"
    )


class ProportionConfig(BaseModel):
    """Panel count and proportional sequence.

    Attributes:
        panel_count: Number of panels (1 to 50)
        type: Proportional sequence used for panel heights
    """

    model_config = ConfigDict(extra="forbid")

    panel_count: int = Field(default=2, ge=1, le=MAX_PANEL_COUNT)
    type: ProportionType = ProportionType.GOLDEN


class PeepholeConfigSchema(BaseModel):
    """Peephole configuration.

    Attributes:
        diameter: Peephole diameter
        distance_from_top: Top of the peephole from the door top (fixed mode)
        auto_center: Search panel and gap centers for the best position
        prefer_gap_placement: Try gap centers before panel centers
        min_edge_distance: Minimum clearance to any panel edge
        conflict_model: How clearance is measured (rim or center)
    """

    model_config = ConfigDict(extra="forbid")

    diameter: float = Field(default=6.0, gt=0, le=50)
    distance_from_top: float = Field(default=45.0, ge=0)
    auto_center: bool = False
    prefer_gap_placement: bool = False
    min_edge_distance: float = Field(default=DEFAULT_MIN_EDGE_DISTANCE, ge=0)
    conflict_model: ConflictModel = ConflictModel.RADIUS_AWARE


class OutputConfig(BaseModel):
    """Configuration for output format and destination.

    Attributes:
        format: Output format (text report, JSON, SVG preview or DXF)
        output_file: Path to write the output to (stdout if omitted)
        preview_width: Pixel width of the door in the SVG preview
    """

    model_config = ConfigDict(extra="forbid")

    format: Literal["text", "json", "svg", "dxf"] = "text"
    output_file: str | None = None
    preview_width: float = Field(default=380.0, gt=0, le=5000)


class DoorPanelConfiguration(BaseModel):
    """Root configuration model for door panel layouts.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        door: Door dimensions
        spacing: Edge and gap spacing
        proportion: Panel count and proportional sequence
        peephole: Optional peephole configuration
        output: Output configuration

    Example:
        >>> config = DoorPanelConfiguration(
        ...     schema_version="1.0",
        ...     door=DoorConfig(width=103.0, height=201.0),
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    door: DoorConfig
    spacing: SpacingConfigSchema = Field(default_factory=SpacingConfigSchema)
    proportion: ProportionConfig = Field(default_factory=ProportionConfig)
    peephole: PeepholeConfigSchema | None = Field(
        default=None, description="Peephole (optional)"
    )
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions within a supported major version are accepted.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )

    @model_validator(mode="after")
    def validate_peephole_on_door(self) -> "DoorPanelConfiguration":
        """Validate that a fixed peephole lies on the door face."""
        peephole = self.peephole
        if peephole is None or peephole.auto_center:
            return self
        if peephole.diameter >= self.door.width:
            raise ValueError(
                f"Peephole diameter ({peephole.diameter}) must be smaller than "
                f"the door width ({self.door.width})"
            )
        if peephole.distance_from_top + peephole.diameter > self.door.height:
            raise ValueError(
                f"Peephole (top {peephole.distance_from_top}, diameter "
                f"{peephole.diameter}) extends past the door bottom "
                f"({self.door.height})"
            )
        return self
