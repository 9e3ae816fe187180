"""Syntax validator: runs a dialect's rules over source text line by line."""

from __future__ import annotations

import logging

from stylesweep.errors import SyntaxValidationError
from stylesweep.model.diagnostic import Diagnostic, ValidationResult
from stylesweep.model.dialect import Dialect, get_dialect
from stylesweep.validation.rules import DIALECT_RULES, LineRule, SourceLine

logger = logging.getLogger(__name__)


def validate(
    source: str,
    dialect: Dialect | str,
    extra_rules: list[LineRule] | None = None,
) -> ValidationResult:
    """Check *source* against the conventions of *dialect*.

    Diagnostics come back in discovery order: by line, then by rule order
    within the line. Whole-source findings are anchored at line 1 and follow
    that line's own findings. Empty input yields an empty result.

    Raises:
        UnknownDialectError: If *dialect* is not a registered dialect.
    """
    config = get_dialect(dialect)
    if not source:
        return ValidationResult()

    dialect_rules = DIALECT_RULES[config.id]
    line_rules: list[LineRule] = list(dialect_rules.line_rules)
    if extra_rules:
        line_rules.extend(extra_rules)

    diagnostics: list[Diagnostic] = []
    for number, text in enumerate(source.split("\n"), start=1):
        line = SourceLine(number=number, text=text)
        for rule in line_rules:
            diagnostics.extend(rule(line, config))
        if number == 1:
            for source_rule in dialect_rules.source_rules:
                diagnostics.extend(source_rule(source, config))

    result = ValidationResult.from_diagnostics(diagnostics)
    logger.info(
        "Validated %s source: %d error(s), %d warning(s)",
        config.display_name,
        len(result.errors),
        len(result.warnings),
    )
    return result


def validate_or_raise(
    source: str,
    dialect: Dialect | str,
    extra_rules: list[LineRule] | None = None,
) -> ValidationResult:
    """Run validation; raises :class:`SyntaxValidationError` if any errors exist.

    Returns the result (warnings only) when no errors are found.
    """
    result = validate(source, dialect, extra_rules=extra_rules)
    if not result.ok:
        raise SyntaxValidationError(result)
    return result
