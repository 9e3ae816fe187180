"""Stylesweep model layer -- public type re-exports."""

from stylesweep.model.css import (
    MediaBlock,
    OptimizationReport,
    OptimizationStats,
    ParsedRule,
    ParseResult,
)
from stylesweep.model.diagnostic import Category, Diagnostic, Severity, ValidationResult
from stylesweep.model.dialect import (
    DIALECTS,
    Dialect,
    DialectConfig,
    dialect_for_path,
    get_dialect,
    resolve_dialect,
)

__all__ = [
    # dialect
    "Dialect",
    "DialectConfig",
    "DIALECTS",
    "get_dialect",
    "resolve_dialect",
    "dialect_for_path",
    # diagnostic
    "Severity",
    "Category",
    "Diagnostic",
    "ValidationResult",
    # css
    "ParsedRule",
    "MediaBlock",
    "ParseResult",
    "OptimizationStats",
    "OptimizationReport",
]
