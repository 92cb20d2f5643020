"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from doorpanels.application.config.schema import (
    DoorConfig,
    PeepholeConfigSchema,
    ProportionConfig,
    SpacingConfigSchema,
)


class CalculateRequest(BaseModel):
    """Request for calculating a door panel layout."""

    door: DoorConfig = Field(..., description="Door dimensions")
    spacing: SpacingConfigSchema = Field(
        default_factory=SpacingConfigSchema, description="Edge and gap spacing"
    )
    proportion: ProportionConfig = Field(
        default_factory=ProportionConfig, description="Panel count and proportion"
    )
    peephole: PeepholeConfigSchema | None = Field(
        default=None, description="Optional peephole"
    )

    def to_config_dict(self) -> dict[str, Any]:
        """Build a configuration dictionary for load_config_from_dict()."""
        data = self.model_dump(mode="json")
        data["schema_version"] = "1.0"
        return data


class CalculateFromConfigRequest(BaseModel):
    """Request for calculating a layout from a full configuration."""

    config: dict[str, Any] = Field(..., description="Full door panel configuration JSON")


class ConfigValidateRequest(BaseModel):
    """Request for validating a configuration."""

    config: dict[str, Any] = Field(..., description="Door panel configuration JSON")


class ExportRequest(CalculateRequest):
    """Request for exporting a layout to a specific format."""

    preview_width: float = Field(
        default=380.0, gt=0, le=5000, description="SVG preview width in pixels"
    )

    def to_config_dict(self) -> dict[str, Any]:
        """Build a configuration dictionary, moving the preview width to output."""
        data = super().to_config_dict()
        data["output"] = {"preview_width": data.pop("preview_width")}
        return data
