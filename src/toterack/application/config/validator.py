"""Validation structures and quote advisory checks.

Schema validation catches malformed values. The checks here look at the
configuration as a whole: lumber overrides that name unknown cuts or
lengths, cuts longer than any board, missing board prices, and layouts
outside the price table.
"""

from dataclasses import dataclass, field
from typing import Any

from toterack.application.config.schema import QuoteConfiguration
from toterack.domain import (
    ContainerDims,
    Layout,
    derive_geometry,
    estimate_price,
)


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "lumber.overrides.Runners")
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
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """CLI exit code: 0 valid, 1 errors, 2 valid with warnings."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(self, path: str, message: str, value: Any = None) -> None:
        self.errors.append(ValidationError(path=path, message=message, value=value))

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> None:
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )


def validate_config(config: QuoteConfiguration) -> ValidationResult:
    """Run whole-configuration checks on a schema-valid configuration.

    Args:
        config: A QuoteConfiguration that passed schema validation.

    Returns:
        ValidationResult with any errors and warnings found.
    """
    result = ValidationResult()
    _, cuts = derive_geometry(
        ContainerDims(
            length=config.container.length,
            width=config.container.width,
            height=config.container.height,
        ),
        Layout(columns=config.layout.columns, rows=config.layout.rows),
    )
    lengths_ft = sorted(config.lumber.stock_lengths)
    longest_in = lengths_ft[-1] * 12
    cut_lengths = {cut.label: cut.length for cut in cuts}

    for label, feet in config.lumber.overrides.items():
        path = f"lumber.overrides.{label}"
        if label not in cut_lengths:
            result.add_error(
                path,
                f"Unknown cut '{label}'. Valid cuts: {', '.join(cut_lengths)}",
                value=label,
            )
        elif feet not in lengths_ft:
            result.add_error(
                path, f"{feet:g} ft is not one of the stock lengths", value=feet
            )
        elif feet * 12 < cut_lengths[label]:
            result.add_warning(
                path,
                f"{feet:g} ft boards are shorter than {label} "
                f"({cut_lengths[label]:.2f} in); the cheapest option will be used",
            )

    for cut in cuts:
        if cut.length > longest_in:
            result.add_warning(
                "lumber.stock_lengths",
                f"{cut.label} ({cut.length:.2f} in) are longer than the longest "
                f"board ({lengths_ft[-1]:g} ft)",
                suggestion="Add a longer stock length or reduce the layout",
            )

    for feet in lengths_ft:
        if feet not in config.lumber.board_prices:
            result.add_warning(
                "lumber.board_prices",
                f"No price for {feet:g} ft boards; they will be priced at $0",
            )

    estimate = estimate_price(config.layout.columns, config.layout.rows)
    if not estimate.exact and config.pricing.price_override is None:
        result.add_warning(
            "layout",
            f"{config.layout.columns}x{config.layout.rows} is outside the price "
            f"table; suggested price ${estimate.price:g} is extrapolated",
            suggestion="Set pricing.price_override to confirm the price",
        )

    return result
