"""Conversion from configuration schema models to domain inputs."""

from doorpanels.application.config.schema import (
    DoorPanelConfiguration,
    PeepholeConfigSchema,
)
from doorpanels.domain.value_objects import (
    DoorSpec,
    LayoutInput,
    PeepholeSpec,
    ProportionSpec,
    SpacingConfig,
)


def config_to_peephole_spec(peephole: PeepholeConfigSchema | None) -> PeepholeSpec | None:
    """Convert a peephole schema model to a domain PeepholeSpec."""
    if peephole is None:
        return None
    return PeepholeSpec(
        diameter=peephole.diameter,
        distance_from_top=peephole.distance_from_top,
        auto_center=peephole.auto_center,
        prefer_gap_placement=peephole.prefer_gap_placement,
        min_edge_distance=peephole.min_edge_distance,
        conflict_model=peephole.conflict_model,
    )


def config_to_layout_input(config: DoorPanelConfiguration) -> LayoutInput:
    """Convert a validated configuration into the engine's input snapshot.

    Args:
        config: A validated DoorPanelConfiguration

    Returns:
        LayoutInput ready for compute_layout()
    """
    return LayoutInput(
        door=DoorSpec(width=config.door.width, height=config.door.height),
        spacing=SpacingConfig(
            edge_distance=config.spacing.edge_distance,
            panel_gap=config.spacing.panel_gap,
            auto_calculate=config.spacing.auto_calculate,
            target_ratio=config.spacing.target_ratio,
        ),
        proportion=ProportionSpec(
            panel_count=config.proportion.panel_count,
            proportion_type=config.proportion.type,
        ),
        peephole=config_to_peephole_spec(config.peephole),
    )
