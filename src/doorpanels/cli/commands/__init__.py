"""CLI command implementations for the doorpanels application.

- validate: Validate a configuration file
"""

from doorpanels.cli.commands.validate import (
    display_load_error,
    display_validation_result,
    validate_command,
)

__all__ = ["display_load_error", "display_validation_result", "validate_command"]
