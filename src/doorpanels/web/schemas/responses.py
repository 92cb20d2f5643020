"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class DoorSchema(BaseModel):
    """Door dimensions."""

    width: float = Field(..., description="Door width")
    height: float = Field(..., description="Door height")


class ProportionSchema(BaseModel):
    """Proportion sequence actually used."""

    type: str = Field(..., description="Proportion type")
    panel_count: int = Field(..., description="Number of panels laid out")
    weights: list[float] = Field(..., description="Raw weights, top to bottom")
    normalized_weights: list[float] = Field(..., description="Weights summing to 1")


class SpacingSchema(BaseModel):
    """Effective spacing."""

    edge: float = Field(..., description="Edge distance used")
    gap: float = Field(..., description="Panel gap used")
    source: str = Field(..., description="manual, solved or fallback")
    auto_calculated: bool


class PanelSchema(BaseModel):
    """One panel, measured from the door top."""

    index: int
    top: float
    bottom: float
    height: float


class GapSchema(BaseModel):
    """Gap between panel ``index`` and the next."""

    index: int
    top: float
    bottom: float


class PanelLayoutSchema(BaseModel):
    """Absolute panel geometry."""

    panel_width: float
    available_width: float
    available_height: float
    available_height_for_panels: float
    total_used_height: float
    fits: bool
    panels: list[PanelSchema]
    gaps: list[GapSchema]


class PanelConflictSchema(BaseModel):
    """Peephole classification against one panel."""

    panel_index: int
    type: str
    distance: float | None = None
    message: str = ""


class GapConflictSchema(BaseModel):
    """Peephole classification against the gap holding its center."""

    type: str
    gap_index: int | None = None
    distance: float | None = None
    message: str = ""


class CoordinatesSchema(BaseModel):
    """Peephole center coordinates."""

    x: float
    from_top: float
    from_bottom: float


class PeepholeSchema(BaseModel):
    """Resolved peephole position and conflicts."""

    diameter: float
    top: float
    center: float
    in_gap: bool
    source: str
    ideal_center: float | None = None
    coordinates: CoordinatesSchema
    panel_conflicts: list[PanelConflictSchema]
    gap_conflict: GapConflictSchema
    has_conflict: bool


class VerificationSchema(BaseModel):
    """Area figures and ratio deviation. Infinite ratios are null."""

    total_door_area: float
    total_panel_area: float
    negative_space_area: float
    actual_ratio: float | None = None
    target_ratio: float | None = None
    ratio_error_pct: float | None = None
    edge_area: float
    gap_area: float
    remainder_area: float


class LayoutResultSchema(BaseModel):
    """Response for layout calculation."""

    is_valid: bool = Field(..., description="Whether the layout can be built")
    errors: list[str] = Field(default_factory=list, description="Error messages")
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Advisory warnings"
    )
    door: DoorSchema
    proportion: ProportionSchema
    spacing: SpacingSchema
    layout: PanelLayoutSchema
    peephole: PeepholeSchema | None = None
    verification: VerificationSchema


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    exit_code: int = Field(..., description="0 clean, 1 errors, 2 warnings only")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class ExportFormatsSchema(BaseModel):
    """Response for available export formats."""

    formats: list[str] = Field(..., description="Available format names")


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
