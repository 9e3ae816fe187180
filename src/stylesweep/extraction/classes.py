"""Class usage extraction from markup and component source.

Only quoted string literals are read. Class names assembled at runtime
(``"btn-" + size``, template literals, variables) are not detected, and the
optimizer will treat them as unused.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from stylesweep.model.dialect import Dialect, get_dialect

__all__ = ["extract_class_names", "dialect_class_attributes"]

DEFAULT_ATTRIBUTES = ("className",)

_LITERAL_RE = re.compile(r"""['"]([^'"]+)['"]""")


def _attribute_patterns(attribute: str) -> tuple[re.Pattern[str], re.Pattern[str], re.Pattern[str]]:
    # Not preceded by a name character, so ``class`` skips ``data-class`` and ``:class``.
    name = rf"(?<![\w:.-]){re.escape(attribute)}"
    return (
        # className="a b"
        re.compile(rf"""{name}=["']([^"']+)["']"""),
        # className={'a b'}
        re.compile(rf"""{name}=\{{['"]([^'"]+)['"]\}}"""),
        # className={cond ? 'a' : 'b'} -- the expression up to the first "}"
        re.compile(rf"""{name}=\{{([^}}]*)"""),
    )


def _add_tokens(classes: set[str], literal: str) -> None:
    classes.update(token for token in literal.split() if token)


def extract_class_names(
    markup: str, attributes: Iterable[str] = DEFAULT_ATTRIBUTES
) -> set[str]:
    """Collect the distinct class names referenced as literals in *markup*.

    Three scans run per attribute: a quoted value, a braced single literal,
    and every quoted literal inside a braced expression (which also covers
    the second). Each literal is split on whitespace.
    """
    classes: set[str] = set()
    for attribute in attributes:
        string_re, template_re, expression_re = _attribute_patterns(attribute)
        for match in string_re.finditer(markup):
            _add_tokens(classes, match.group(1))
        for match in template_re.finditer(markup):
            _add_tokens(classes, match.group(1))
        for match in expression_re.finditer(markup):
            for literal in _LITERAL_RE.findall(match.group(1)):
                _add_tokens(classes, literal)
    return classes


def dialect_class_attributes(dialect: Dialect | str) -> tuple[str, ...]:
    """Attribute names that carry class lists in *dialect*'s markup."""
    attributes = get_dialect(dialect).attributes
    if "className" in attributes:
        return ("className",)
    if "class" in attributes:
        return ("class",)
    return DEFAULT_ATTRIBUTES
