"""Exception types raised by stylesweep."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from stylesweep.model.diagnostic import ValidationResult


class StylesweepError(Exception):
    """Base class for stylesweep errors."""


class UnknownDialectError(StylesweepError, ValueError):
    """Raised when a dialect identifier is not in the registry."""

    def __init__(self, dialect: str) -> None:
        self.dialect = dialect
        super().__init__(f"Unknown dialect: {dialect!r}")


class SyntaxValidationError(StylesweepError):
    """Raised when validation produces ERROR-severity diagnostics."""

    def __init__(self, result: ValidationResult) -> None:
        self.result = result
        messages = [str(d) for d in result.errors]
        super().__init__(
            f"Validation failed with {len(messages)} error(s): " + "; ".join(messages)
        )


class ConfigError(StylesweepError, ValueError):
    """Raised when a ``STYLESWEEP_*`` environment variable cannot be used."""
