"""CSS optimizer: merge duplicate selectors, drop unused classes, minify.

The unused-class filter is deliberately aggressive: a selector is dropped
when *any* class it names is missing from the used set, so compound
selectors such as ``.card.active`` go away if either class is unseen.
Selectors containing ``:`` (pseudo-classes and pseudo-elements) are always
kept.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Set

from stylesweep.stylesheet.parser import group_rules, parse_rules

__all__ = ["optimize", "filter_unused", "serialize_groups", "selector_classes"]

logger = logging.getLogger(__name__)

_CLASS_TOKEN_RE = re.compile(r"\.([a-zA-Z0-9_-]+)")

Grouped = dict[str, dict[str, str]]


def selector_classes(selector: str) -> list[str]:
    """Class names referenced by *selector*, without the leading dot."""
    return _CLASS_TOKEN_RE.findall(selector)


def _is_unused(selector: str, used_classes: Set[str]) -> bool:
    classes = selector_classes(selector)
    if not classes or ":" in selector:
        return False
    return any(cls not in used_classes for cls in classes)


def filter_unused(grouped: Grouped, used_classes: Set[str]) -> Grouped:
    """Return the groups whose selectors survive the unused-class filter."""
    kept: Grouped = {}
    for selector, declarations in grouped.items():
        if _is_unused(selector, used_classes):
            logger.debug("Dropping unused selector %r", selector)
            continue
        kept[selector] = declarations
    return kept


def serialize_groups(grouped: Grouped) -> str:
    """Render groups compactly: ``sel{prop:value;prop:value;}``."""
    parts: list[str] = []
    for selector, declarations in grouped.items():
        body = "".join(f"{prop}:{value};" for prop, value in declarations.items())
        parts.append(f"{selector}{{{body}}}")
    return "".join(parts)


def optimize(css: str, used_classes: Set[str] | None = None) -> str:
    """Merge, optionally filter, and minify *css*.

    When *used_classes* is None no filtering happens; an empty set filters
    out every class-bearing selector that has no ``:``. Media blocks are
    optimized independently and emitted after the top-level rules, and only
    when at least one of their rules survives.
    """
    parsed = parse_rules(css)

    grouped = group_rules(parsed.rules)
    if used_classes is not None:
        grouped = filter_unused(grouped, used_classes)
    output = serialize_groups(grouped)

    for block in parsed.media_blocks:
        media_grouped = group_rules(block.rules)
        if used_classes is not None:
            media_grouped = filter_unused(media_grouped, used_classes)
        if not media_grouped:
            logger.debug("Dropping empty media block %r", block.query)
            continue
        output += f"@media {block.query}{{{serialize_groups(media_grouped)}}}"

    return output
