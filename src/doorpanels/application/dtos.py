"""Data transfer objects for the application layer."""

from dataclasses import dataclass, field

from doorpanels.application.config.validator import ValidationResult
from doorpanels.domain.value_objects import LayoutResult


@dataclass
class LayoutOutput:
    """Output DTO containing a computed layout and its advisories.

    Attributes:
        result: Layout computed by the engine.
        validation: Advisory checks run against the layout.
        errors: Error messages if the calculation was rejected.
    """

    result: LayoutResult | None
    validation: ValidationResult = field(default_factory=ValidationResult)
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """True when a layout was produced and no blocking errors were found."""
        return self.result is not None and not self.errors and self.validation.is_valid
