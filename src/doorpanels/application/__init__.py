"""Application layer - use cases and orchestration."""

from .commands import CalculateLayoutCommand
from .dtos import LayoutOutput

__all__ = [
    "CalculateLayoutCommand",
    "LayoutOutput",
]
