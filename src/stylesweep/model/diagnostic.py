"""Diagnostic model: structured findings produced by the syntax validator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class Severity(StrEnum):
    """Severity level for a diagnostic message."""

    ERROR = "error"
    WARNING = "warning"


class Category(StrEnum):
    """What kind of mistake a diagnostic describes."""

    COMMENT = "comment"
    ATTRIBUTE = "attribute"
    STRUCTURE = "structure"
    STYLE = "style"


@dataclass(frozen=True)
class Diagnostic:
    """A single validation finding tied to a source line.

    Attributes:
        line: 1-based line number the finding is anchored at.
        message: Human-readable description of the problem.
        category: The kind of mistake (comment, attribute, structure, style).
        severity: ERROR for must-fix issues, WARNING for suggestions.
        suggestion: Suggested replacement text, if available.
        rule: Identifier for the validation rule that produced this diagnostic.
    """

    line: int
    message: str
    category: Category
    severity: Severity
    suggestion: str | None = None
    rule: str = ""

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def to_dict(self) -> dict[str, Any]:
        return {
            "line": self.line,
            "message": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "suggestion": self.suggestion,
            "rule": self.rule,
        }

    def __str__(self) -> str:
        text = f"{self.severity.value.upper()} line {self.line} [{self.category.value}]: {self.message}"
        if self.suggestion:
            text += f" (suggestion: {self.suggestion})"
        return text


@dataclass(frozen=True)
class ValidationResult:
    """Errors and warnings from one validation pass, in discovery order."""

    errors: tuple[Diagnostic, ...] = ()
    warnings: tuple[Diagnostic, ...] = ()

    @classmethod
    def from_diagnostics(cls, diagnostics: list[Diagnostic]) -> ValidationResult:
        """Split a mixed, ordered list into errors and warnings."""
        return cls(
            errors=tuple(d for d in diagnostics if d.is_error),
            warnings=tuple(d for d in diagnostics if d.is_warning),
        )

    @property
    def ok(self) -> bool:
        """True when no ERROR diagnostics were found."""
        return not self.errors

    @property
    def is_empty(self) -> bool:
        return not self.errors and not self.warnings

    @property
    def all(self) -> tuple[Diagnostic, ...]:
        return self.errors + self.warnings

    def to_dict(self) -> dict[str, Any]:
        return {
            "errors": [d.to_dict() for d in self.errors],
            "warnings": [d.to_dict() for d in self.warnings],
        }
