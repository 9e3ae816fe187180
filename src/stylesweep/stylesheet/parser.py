"""Regex-based CSS rule parser.

Handles flat ``selector { declarations }`` rules and one level of
``@media`` blocks. A media block's content runs to the first ``}`` that is
followed by another ``@media`` or the end of the text, so rules written
after a media block are absorbed into it. Nested braces beyond one level
are not supported.

Every scan is linear in the input: each pattern's repeated parts stop at
the next brace (or ``@``), and unterminated comments and media blocks end
the scan instead of being retried from every later position.
"""

from __future__ import annotations

import logging
import re

from stylesweep.model.css import MediaBlock, ParsedRule, ParseResult

__all__ = ["parse_rules", "parse_declarations", "strip_comments", "group_rules"]

logger = logging.getLogger(__name__)

# Opening of a media block: "@media <query> {"
_MEDIA_START_RE = re.compile(r"@media(?P<query>[^{}@]+)\{")

# The brace closing a media block is followed by another @media or EOF.
_MEDIA_END_RE = re.compile(r"\}(?=\s*(?:@media|\Z))")

_RULE_RE = re.compile(
    r"""
    (?:^|(?<=[{}]))         # selectors start after a brace or at the beginning
    (?P<selector>[^{}]+)    # everything before the opening brace
    \{
    (?P<body>[^{}]+)        # declarations, no nested braces
    \}
    """,
    re.VERBOSE,
)


def strip_comments(css: str) -> str:
    """Remove every ``/* ... */`` block comment, including multi-line ones.

    An unterminated comment is left in place, as is everything after it.
    """
    parts: list[str] = []
    pos = 0
    while True:
        start = css.find("/*", pos)
        if start == -1:
            break
        end = css.find("*/", start + 2)
        if end == -1:
            break
        parts.append(css[pos:start])
        pos = end + 2
    parts.append(css[pos:])
    return "".join(parts)


def parse_declarations(body: str) -> dict[str, str]:
    """Parse a rule body into an ordered property mapping.

    Declarations split on ``;`` and then on the first ``:``. Entries with
    an empty property or value are skipped; a repeated property keeps its
    last value.
    """
    declarations: dict[str, str] = {}
    for raw in body.split(";"):
        prop, _, value = raw.partition(":")
        prop = prop.strip()
        value = value.strip()
        if prop and value:
            declarations[prop] = value
    return declarations


def _parse_flat_rules(css: str) -> list[ParsedRule]:
    rules: list[ParsedRule] = []
    for match in _RULE_RE.finditer(css):
        selector = match.group("selector").strip()
        body = match.group("body").strip()
        if not selector or not body:
            continue
        declarations = parse_declarations(body)
        if declarations:  # skip rules with no valid declarations
            rules.append(ParsedRule(selector=selector, declarations=declarations))
    return rules


def _split_media(css: str) -> tuple[list[MediaBlock], str]:
    """Pull media blocks out of *css*; returns them and the remaining text."""
    media_blocks: list[MediaBlock] = []
    remainder: list[str] = []
    pos = 0
    while True:
        start = _MEDIA_START_RE.search(css, pos)
        if start is None:
            break
        end = _MEDIA_END_RE.search(css, start.end())
        if end is None:  # no later block can close either
            break
        media_blocks.append(
            MediaBlock(
                query=start.group("query").strip(),
                rules=tuple(_parse_flat_rules(css[start.end():end.start()])),
            )
        )
        remainder.append(css[pos:start.start()])
        pos = end.end()
    remainder.append(css[pos:])
    return media_blocks, "".join(remainder)


def parse_rules(css: str) -> ParseResult:
    """Parse CSS text into top-level rules and media blocks, in source order."""
    media_blocks, css = _split_media(strip_comments(css))

    rules = _parse_flat_rules(css)
    logger.debug(
        "Parsed %d rule(s) and %d media block(s)", len(rules), len(media_blocks)
    )
    return ParseResult(rules=tuple(rules), media_blocks=tuple(media_blocks))


def group_rules(rules: tuple[ParsedRule, ...] | list[ParsedRule]) -> dict[str, dict[str, str]]:
    """Merge rules sharing a selector into one declaration mapping.

    Selectors keep their first-seen order. For a property set by more than
    one occurrence, the later occurrence's value wins.
    """
    grouped: dict[str, dict[str, str]] = {}
    for rule in rules:
        merged = grouped.setdefault(rule.selector, {})
        for prop, value in rule.declarations.items():
            merged[prop] = value
    return grouped
