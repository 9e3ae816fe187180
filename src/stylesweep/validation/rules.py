"""Validation rules for source dialects.

Each line rule is a function taking a SourceLine and the DialectConfig and
returning a list of Diagnostic objects. Source rules look at the whole text
once. These are pattern heuristics, not a grammar: false positives and
misses outside the catalog below are expected.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable

from stylesweep.model.diagnostic import Category, Diagnostic, Severity
from stylesweep.model.dialect import Dialect, DialectConfig


@dataclass(frozen=True)
class SourceLine:
    """One line of input with its 1-based number."""

    number: int
    text: str

    @property
    def trimmed(self) -> str:
        return self.text.strip()


LineRule = Callable[[SourceLine, DialectConfig], list[Diagnostic]]
SourceRule = Callable[[str, DialectConfig], list[Diagnostic]]


# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

_CLASS_ATTR_RE = re.compile(r"""class=["'][^"']*["']""")

# An opening tag whose ">" is on a later line.
_DANGLING_TAG_RE = re.compile(r"<[a-zA-Z][^<>]*$")

# A declaration or control keyword, whitespace, then at least two more characters.
_STATEMENT_RE = re.compile(r"(?:const|let|var|return|import|export|throw)\s..")
_TERMINATORS = frozenset(";{}[]")

LOWERCASE_EVENTS = ("onclick=", "onchange=", "onsubmit=")


def _camel_event(event: str) -> str:
    """``onclick=`` -> ``onClick=``: upper-case the letter after ``on``."""
    return event[:2] + event[2].upper() + event[3:]


# ---------------------------------------------------------------------------
# Comment rules
# ---------------------------------------------------------------------------


def check_hash_comment(line: SourceLine, config: DialectConfig) -> list[Diagnostic]:
    """``#`` is not a comment in script dialects (shebangs excepted)."""
    trimmed = line.trimmed
    if trimmed.startswith("#") and not trimmed.startswith("#!/"):
        return [
            Diagnostic(
                line=line.number,
                message="Wrong comment syntax: use '//' or '/* */' instead of '#'",
                category=Category.COMMENT,
                severity=Severity.ERROR,
                suggestion=f"{config.line_comment} {trimmed.lstrip('#').strip()}".rstrip(),
                rule="check_hash_comment",
            )
        ]
    return []


def check_html_comment_forbidden(line: SourceLine, config: DialectConfig) -> list[Diagnostic]:
    """``<!--`` has no meaning in script dialects."""
    if "<!--" in line.text:
        return [
            Diagnostic(
                line=line.number,
                message=f"HTML comment syntax not allowed in {config.display_name}",
                category=Category.COMMENT,
                severity=Severity.ERROR,
                rule="check_html_comment_forbidden",
            )
        ]
    return []


def check_php_html_comment(line: SourceLine, config: DialectConfig) -> list[Diagnostic]:
    """HTML comments in PHP are fine only in HTML context. WARNING."""
    if "<!--" in line.text and "?>" not in line.text:
        return [
            Diagnostic(
                line=line.number,
                message=f"HTML comment in {config.display_name} file - make sure it's in HTML context",
                category=Category.COMMENT,
                severity=Severity.WARNING,
                rule="check_php_html_comment",
            )
        ]
    return []


def check_script_comment_in_markup(line: SourceLine, config: DialectConfig) -> list[Diagnostic]:
    """``//`` and ``/*`` lines outside a script block are not markup comments."""
    trimmed = line.trimmed
    if trimmed.startswith("//") or (trimmed.startswith("/*") and "<script" not in trimmed):
        open_, close = config.block_comment
        return [
            Diagnostic(
                line=line.number,
                message=f"JavaScript comment syntax not allowed in {config.display_name} (use {open_} {close})",
                category=Category.COMMENT,
                severity=Severity.ERROR,
                rule="check_script_comment_in_markup",
            )
        ]
    return []


# ---------------------------------------------------------------------------
# Attribute rules
# ---------------------------------------------------------------------------


def check_class_attribute(line: SourceLine, config: DialectConfig) -> list[Diagnostic]:
    """Components use ``className``; suggest the rewritten attribute."""
    if "class=" not in line.text or "className=" in line.text:
        return []
    match = _CLASS_ATTR_RE.search(line.text)
    if match is None:
        return []
    return [
        Diagnostic(
            line=line.number,
            message=f"Use 'className' instead of 'class' in {config.display_name}",
            category=Category.ATTRIBUTE,
            severity=Severity.ERROR,
            suggestion=match.group(0).replace("class=", "className=", 1),
            rule="check_class_attribute",
        )
    ]


def check_for_attribute(line: SourceLine, config: DialectConfig) -> list[Diagnostic]:
    if "for=" in line.text:
        return [
            Diagnostic(
                line=line.number,
                message=f"Use 'htmlFor' instead of 'for' in {config.display_name}",
                category=Category.ATTRIBUTE,
                severity=Severity.ERROR,
                rule="check_for_attribute",
            )
        ]
    return []


def check_classname_in_markup(line: SourceLine, config: DialectConfig) -> list[Diagnostic]:
    """``className`` is a component-only spelling."""
    if "className=" in line.text:
        return [
            Diagnostic(
                line=line.number,
                message=f"Use 'class' instead of 'className' in {config.display_name}",
                category=Category.ATTRIBUTE,
                severity=Severity.ERROR,
                suggestion="class=",
                rule="check_classname_in_markup",
            )
        ]
    return []


def check_string_style(line: SourceLine, config: DialectConfig) -> list[Diagnostic]:
    if 'style="' in line.text:
        return [
            Diagnostic(
                line=line.number,
                message=(
                    f"Style should be an object in {config.display_name}: "
                    'style={{...}} not style="..."'
                ),
                category=Category.ATTRIBUTE,
                severity=Severity.ERROR,
                rule="check_string_style",
            )
        ]
    return []


def check_lowercase_events(line: SourceLine, config: DialectConfig) -> list[Diagnostic]:
    """Event handlers not spelled in camelCase (``onclick=``, ``OnClick=``).

    Matching ignores case; a line that already carries the camelCase
    spelling is left alone.
    """
    diagnostics: list[Diagnostic] = []
    lowered = line.text.lower()
    for event in LOWERCASE_EVENTS:
        correct = _camel_event(event)
        if event in lowered and correct not in line.text:
            diagnostics.append(
                Diagnostic(
                    line=line.number,
                    message=f"Use camelCase: '{correct}' instead of '{event}'",
                    category=Category.ATTRIBUTE,
                    severity=Severity.ERROR,
                    suggestion=correct,
                    rule="check_lowercase_events",
                )
            )
    return diagnostics


# ---------------------------------------------------------------------------
# Structure and style rules (WARNING severity)
# ---------------------------------------------------------------------------


def check_unclosed_tag(line: SourceLine, config: DialectConfig) -> list[Diagnostic]:
    """An opening tag left open at end of line may be a multi-line element.

    Only lines with a ``<`` and no ``>`` are considered. Such a line holds
    no complete opening, closing or self-closing tag, so the only thing
    left to count is a ``<tag ...`` running to the end of the line.
    """
    text = line.text
    if "<" not in text or ">" in text:
        return []
    if _DANGLING_TAG_RE.search(text):
        return [
            Diagnostic(
                line=line.number,
                message="Possible unclosed tag or multi-line element",
                category=Category.STRUCTURE,
                severity=Severity.WARNING,
                rule="check_unclosed_tag",
            )
        ]
    return []


def check_missing_semicolon(line: SourceLine, config: DialectConfig) -> list[Diagnostic]:
    trimmed = line.trimmed
    if not trimmed or trimmed.startswith("//") or trimmed.startswith("/*"):
        return []
    if (
        _STATEMENT_RE.match(trimmed)
        and trimmed[-1] not in _TERMINATORS
        and "=>" not in trimmed
    ):
        return [
            Diagnostic(
                line=line.number,
                message="Consider adding semicolon at end of statement",
                category=Category.STYLE,
                severity=Severity.WARNING,
                suggestion=f"{trimmed};",
                rule="check_missing_semicolon",
            )
        ]
    return []


def check_php_open_tag(source: str, config: DialectConfig) -> list[Diagnostic]:
    """Non-empty PHP sources should contain ``<?php``. Reported once, at line 1."""
    if source.strip() and "<?php" not in source:
        return [
            Diagnostic(
                line=1,
                message=f"{config.display_name} file should start with <?php tag",
                category=Category.STRUCTURE,
                severity=Severity.WARNING,
                suggestion="<?php",
                rule="check_php_open_tag",
            )
        ]
    return []


# ---------------------------------------------------------------------------
# Rule registry
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DialectRules:
    """The ordered checks one dialect runs: per line, then once per source."""

    line_rules: tuple[LineRule, ...]
    source_rules: tuple[SourceRule, ...] = ()


_COMPONENT_RULES = DialectRules(
    line_rules=(
        check_hash_comment,
        check_html_comment_forbidden,
        check_class_attribute,
        check_for_attribute,
        check_unclosed_tag,
        check_string_style,
        check_lowercase_events,
        check_missing_semicolon,
    )
)

_SCRIPT_RULES = DialectRules(
    line_rules=(
        check_hash_comment,
        check_html_comment_forbidden,
        check_missing_semicolon,
    )
)

DIALECT_RULES: dict[Dialect, DialectRules] = {
    Dialect.JSX: _COMPONENT_RULES,
    Dialect.TSX: _COMPONENT_RULES,
    Dialect.JS: _SCRIPT_RULES,
    Dialect.TS: _SCRIPT_RULES,
    Dialect.PHP: DialectRules(
        line_rules=(check_php_html_comment, check_classname_in_markup),
        source_rules=(check_php_open_tag,),
    ),
    Dialect.HTML: DialectRules(
        line_rules=(
            check_script_comment_in_markup,
            check_classname_in_markup,
            check_unclosed_tag,
        )
    ),
    Dialect.VUE: DialectRules(line_rules=(check_unclosed_tag,)),
}
