"""Configuration schema and loading system for door panel layouts.

This package provides JSON-based configuration loading and validation.
It includes Pydantic models for schema validation, a configuration
loader with error reporting, CLI override merging and layout advisory
checks.

Example:
    >>> from pathlib import Path
    >>> from doorpanels.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("front-door.json"))
    ...     print(f"Door: {config.door.width}x{config.door.height}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from doorpanels.application.config.adapter import (
    config_to_layout_input,
    config_to_peephole_spec,
)
from doorpanels.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from doorpanels.application.config.merger import merge_config_with_cli
from doorpanels.application.config.schema import (
    MAX_PANEL_COUNT,
    SUPPORTED_VERSIONS,
    DoorConfig,
    DoorPanelConfiguration,
    OutputConfig,
    PeepholeConfigSchema,
    ProportionConfig,
    SpacingConfigSchema,
)
from doorpanels.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    check_layout_advisories,
    check_peephole_advisories,
    validate_config,
)

__all__ = [
    "ConfigError",
    "DoorConfig",
    "DoorPanelConfiguration",
    "MAX_PANEL_COUNT",
    "OutputConfig",
    "PeepholeConfigSchema",
    "ProportionConfig",
    "SUPPORTED_VERSIONS",
    "SpacingConfigSchema",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "check_layout_advisories",
    "check_peephole_advisories",
    "config_to_layout_input",
    "config_to_peephole_spec",
    "load_config",
    "load_config_from_dict",
    "merge_config_with_cli",
    "validate_config",
]
