"""Dialect registry: comment syntax and idiomatic attributes per file type."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import PurePath

from stylesweep.errors import UnknownDialectError


class Dialect(StrEnum):
    """Supported source dialects, keyed by their usual file extension."""

    JSX = "jsx"
    TSX = "tsx"
    JS = "js"
    TS = "ts"
    PHP = "php"
    HTML = "html"
    VUE = "vue"

    @property
    def long_id(self) -> str:
        return _LONG_IDS[self]


_LONG_IDS = {
    Dialect.JSX: "component-jsx",
    Dialect.TSX: "component-tsx",
    Dialect.JS: "script-js",
    Dialect.TS: "script-ts",
    Dialect.PHP: "server-php",
    Dialect.HTML: "markup-html",
    Dialect.VUE: "template-vue",
}

_ALIASES: dict[str, Dialect] = {
    **{d.value: d for d in Dialect},
    **{long_id: d for d, long_id in _LONG_IDS.items()},
    "htm": Dialect.HTML,
    "mjs": Dialect.JS,
    "cjs": Dialect.JS,
}


@dataclass(frozen=True)
class DialectConfig:
    """Static description of one dialect's comment and attribute conventions."""

    id: Dialect
    display_name: str
    block_comment: tuple[str, str]
    line_comment: str | None = None
    alternate_comment: str | None = None
    html_comment: tuple[str, str] | None = None
    attributes: tuple[str, ...] = ()


_COMPONENT_ATTRIBUTES = ("className", "onClick", "onChange", "style", "id", "key", "ref")

DIALECTS: dict[Dialect, DialectConfig] = {
    Dialect.JSX: DialectConfig(
        id=Dialect.JSX,
        display_name="JSX",
        line_comment="//",
        block_comment=("/*", "*/"),
        attributes=_COMPONENT_ATTRIBUTES,
    ),
    Dialect.TSX: DialectConfig(
        id=Dialect.TSX,
        display_name="TSX",
        line_comment="//",
        block_comment=("/*", "*/"),
        attributes=_COMPONENT_ATTRIBUTES,
    ),
    Dialect.JS: DialectConfig(
        id=Dialect.JS,
        display_name="JavaScript",
        line_comment="//",
        block_comment=("/*", "*/"),
    ),
    Dialect.TS: DialectConfig(
        id=Dialect.TS,
        display_name="TypeScript",
        line_comment="//",
        block_comment=("/*", "*/"),
    ),
    Dialect.PHP: DialectConfig(
        id=Dialect.PHP,
        display_name="PHP",
        line_comment="//",
        block_comment=("/*", "*/"),
        alternate_comment="#",
        attributes=("class", "id", "style"),
    ),
    Dialect.HTML: DialectConfig(
        id=Dialect.HTML,
        display_name="HTML",
        block_comment=("<!--", "-->"),
        attributes=("class", "id", "style", "data-"),
    ),
    Dialect.VUE: DialectConfig(
        id=Dialect.VUE,
        display_name="Vue",
        line_comment="//",
        block_comment=("/*", "*/"),
        html_comment=("<!--", "-->"),
        attributes=("class", ":class", "v-bind:class"),
    ),
}


def resolve_dialect(dialect: Dialect | str) -> Dialect:
    """Normalize a dialect member, short id, or long id to a Dialect.

    Raises:
        UnknownDialectError: If *dialect* names no supported dialect.
    """
    if isinstance(dialect, Dialect):
        return dialect
    key = str(dialect).strip().lower().lstrip(".")
    try:
        return _ALIASES[key]
    except KeyError:
        raise UnknownDialectError(str(dialect)) from None


def get_dialect(dialect: Dialect | str) -> DialectConfig:
    """Look up the registry entry for *dialect*."""
    return DIALECTS[resolve_dialect(dialect)]


def dialect_for_path(path: str | PurePath) -> Dialect | None:
    """Guess a dialect from a file extension; None when it is not recognized."""
    suffix = PurePath(path).suffix.lower().lstrip(".")
    return _ALIASES.get(suffix)
