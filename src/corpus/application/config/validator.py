"""Validation structures and corpus advisory checks.

Pydantic already rejects malformed files. The checks here run on a file
that loaded cleanly and report things the user should know about before
building from it: values that will be clamped, shelves placed outside the
carcass, and overlapping horizontal panels.
"""

from dataclasses import dataclass, field
from typing import Any

from corpus.application.config.adapter import clamped_sizes, config_to_registry
from corpus.application.config.schema import CorpusConfiguration
from corpus.domain import OverlapValidator, ShelfPanel, VerticalLayoutSolver

_SIZE_FIELDS = ("width", "height", "depth", "thickness")


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "panels[0].width")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the configuration has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are errors
            2 if valid but has warnings
        """
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self


def check_clamped_sizes(config: CorpusConfiguration) -> ValidationResult:
    """Warn about sizes that fall outside their allowed ranges."""
    result = ValidationResult()
    for i, panel in enumerate(config.panels):
        for name, clamped in zip(_SIZE_FIELDS, clamped_sizes(panel)):
            value = getattr(panel, name)
            if value != clamped:
                result.add_warning(
                    path=f"panels[{i}].{name}",
                    message=f"{name.capitalize()} {value:g} mm will be stored as {clamped} mm",
                )
    return result


def validate_config(config: CorpusConfiguration) -> ValidationResult:
    """Run the advisory checks on a loaded corpus file.

    Args:
        config: A CorpusConfiguration instance (already validated by Pydantic)

    Returns:
        ValidationResult containing any errors or warnings
    """
    result = check_clamped_sizes(config)

    solver = VerticalLayoutSolver()
    registry = config_to_registry(config, solver=solver)
    low, high = solver.usable_span(registry.panels)
    for i, panel in enumerate(registry.panels):
        if not isinstance(panel, ShelfPanel):
            continue
        if not low <= panel.y_position <= high:
            result.add_warning(
                path=f"panels[{i}].y_position",
                message=(
                    f"Shelf at {panel.y_position:g} mm is outside the usable "
                    f"span {low:g}-{high:g} mm"
                ),
                suggestion="Move the shelf or re-spread the shelves",
            )

    for pair in OverlapValidator().find_overlaps(registry.panels):
        result.add_warning(
            path="panels",
            message=pair.message,
            suggestion="Move one of the panels or reduce its thickness",
        )
    return result
