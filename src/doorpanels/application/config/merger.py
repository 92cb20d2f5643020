"""Configuration merging utilities for CLI override support.

Merges command-line arguments into configuration values with the
precedence: CLI args > config values > defaults. Only non-None CLI
arguments override configuration values.
"""

from pathlib import Path
from typing import Any

from doorpanels.application.config.loader import load_config_from_dict
from doorpanels.application.config.schema import DoorPanelConfiguration


def _override(section: dict[str, Any], key: str, value: Any) -> None:
    if value is not None:
        section[key] = value


def merge_config_with_cli(
    config: DoorPanelConfiguration,
    *,
    width: float | None = None,
    height: float | None = None,
    panel_count: int | None = None,
    proportion: str | None = None,
    edge_distance: float | None = None,
    panel_gap: float | None = None,
    auto_calculate: bool | None = None,
    target_ratio: float | None = None,
    peephole_diameter: float | None = None,
    peephole_top: float | None = None,
    auto_center: bool | None = None,
    prefer_gap_placement: bool | None = None,
    min_edge_distance: float | None = None,
    conflict_model: str | None = None,
    output_format: str | None = None,
    output_file: str | Path | None = None,
) -> DoorPanelConfiguration:
    """Merge CLI arguments with configuration values.

    Any peephole override on a configuration without a peephole adds one
    with default values for the fields not given.

    Args:
        config: The base DoorPanelConfiguration to merge with
        width: Override for door.width
        height: Override for door.height
        panel_count: Override for proportion.panel_count
        proportion: Override for proportion.type
        edge_distance: Override for spacing.edge_distance
        panel_gap: Override for spacing.panel_gap
        auto_calculate: Override for spacing.auto_calculate
        target_ratio: Override for spacing.target_ratio
        peephole_diameter: Override for peephole.diameter
        peephole_top: Override for peephole.distance_from_top
        auto_center: Override for peephole.auto_center
        prefer_gap_placement: Override for peephole.prefer_gap_placement
        min_edge_distance: Override for peephole.min_edge_distance
        conflict_model: Override for peephole.conflict_model
        output_format: Override for output.format
        output_file: Override for output.output_file

    Returns:
        A new, re-validated DoorPanelConfiguration

    Raises:
        ConfigError: If the merged values fail validation.

    Example:
        >>> merged = merge_config_with_cli(config, width=90.0)
        >>> merged.door.width
        90.0
    """
    data = config.model_dump(mode="json")

    _override(data["door"], "width", width)
    _override(data["door"], "height", height)

    _override(data["proportion"], "panel_count", panel_count)
    _override(data["proportion"], "type", proportion)

    spacing = data["spacing"]
    _override(spacing, "edge_distance", edge_distance)
    _override(spacing, "panel_gap", panel_gap)
    _override(spacing, "auto_calculate", auto_calculate)
    _override(spacing, "target_ratio", target_ratio)

    peephole_overrides = {
        "diameter": peephole_diameter,
        "distance_from_top": peephole_top,
        "auto_center": auto_center,
        "prefer_gap_placement": prefer_gap_placement,
        "min_edge_distance": min_edge_distance,
        "conflict_model": conflict_model,
    }
    if any(v is not None for v in peephole_overrides.values()):
        peephole = data["peephole"] or {}
        for key, value in peephole_overrides.items():
            _override(peephole, key, value)
        data["peephole"] = peephole

    _override(data["output"], "format", output_format)
    if output_file is not None:
        data["output"]["output_file"] = str(output_file)

    return load_config_from_dict(data)
