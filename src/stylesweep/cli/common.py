"""Helpers shared by CLI commands."""

from __future__ import annotations

from pathlib import Path

import click

from stylesweep.config import StylesweepConfig
from stylesweep.errors import ConfigError, UnknownDialectError
from stylesweep.model.dialect import Dialect, dialect_for_path, resolve_dialect

DIALECT_HELP = "Source dialect (jsx, tsx, js, ts, php, html, vue); guessed from the extension by default"


def load_config() -> StylesweepConfig:
    """The environment config; a malformed variable is a usage error."""
    try:
        return StylesweepConfig.from_env()
    except ConfigError as exc:
        raise click.UsageError(str(exc)) from exc


def pick_dialect(path: Path, dialect: str | None) -> Dialect:
    """Explicit --dialect, else the file extension, else the configured default."""
    if dialect is not None:
        try:
            return resolve_dialect(dialect)
        except UnknownDialectError as exc:
            raise click.BadParameter(str(exc), param_hint="--dialect") from exc
    guessed = dialect_for_path(path)
    if guessed is not None:
        return guessed
    return resolve_dialect(load_config().default_dialect)
