"""Application commands (use cases) for door panel layouts."""

from __future__ import annotations

import logging

from doorpanels.domain.services import LayoutEngine

from .config import (
    DoorPanelConfiguration,
    ValidationResult,
    check_layout_advisories,
    check_peephole_advisories,
    config_to_layout_input,
)
from .dtos import LayoutOutput

logger = logging.getLogger(__name__)


class CalculateLayoutCommand:
    """Command to compute a door panel layout from a configuration.

    The engine runs once; the advisory checks reuse its result instead of
    recomputing.
    """

    def __init__(self, engine: LayoutEngine | None = None) -> None:
        self.engine = engine or LayoutEngine()

    def execute(self, config: DoorPanelConfiguration) -> LayoutOutput:
        """Compute the layout and attach validation advisories.

        Args:
            config: A validated DoorPanelConfiguration.

        Returns:
            LayoutOutput with the result and its warnings. Geometry that
            cannot be built is reported in ``errors`` alongside the result.
        """
        result = self.engine.compute(config_to_layout_input(config))
        logger.info(
            f"Computed {result.panel_count} {config.proportion.type.value} panels "
            f"for a {config.door.width:g}x{config.door.height:g} door"
        )

        validation = ValidationResult()
        validation.merge(check_layout_advisories(config, result))
        validation.merge(check_peephole_advisories(config, result))

        return LayoutOutput(
            result=result,
            validation=validation,
            errors=[e.message for e in validation.errors],
        )
