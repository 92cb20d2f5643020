"""FastAPI dependency injection for layout services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from doorpanels.application.commands import CalculateLayoutCommand
from doorpanels.domain.services import LayoutEngine


@lru_cache(maxsize=1)
def get_layout_engine() -> LayoutEngine:
    """Get the shared LayoutEngine. The engine is stateless."""
    return LayoutEngine()


def get_calculate_command(
    engine: Annotated[LayoutEngine, Depends(get_layout_engine)],
) -> CalculateLayoutCommand:
    """Dependency for CalculateLayoutCommand."""
    return CalculateLayoutCommand(engine=engine)


# Type aliases for cleaner endpoint signatures
CalculateCommandDep = Annotated[CalculateLayoutCommand, Depends(get_calculate_command)]
