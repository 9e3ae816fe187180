"""CLI command: stylesweep validate -- check a source file's syntax conventions."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from stylesweep.cli.common import DIALECT_HELP, pick_dialect
from stylesweep.model.dialect import get_dialect
from stylesweep.validation import validate as run_validate


@click.command()
@click.argument("sourcefile", type=click.Path(exists=True, dir_okay=False))
@click.option("--dialect", default=None, help=DIALECT_HELP)
def validate(sourcefile: str, dialect: str | None) -> None:
    """Validate a markup or component source file.

    Prints diagnostics (errors, then warnings) and exits with code 0 if no
    errors are found, or code 1 if there are errors.
    """
    source_path = Path(sourcefile)
    resolved = pick_dialect(source_path, dialect)
    source = source_path.read_text(encoding="utf-8")

    result = run_validate(source, resolved)
    name = get_dialect(resolved).display_name

    if result.is_empty:
        click.echo(f"OK: {source_path.name} looks valid {name} (0 diagnostics)")
        sys.exit(0)

    for diag in result.all:
        click.echo(str(diag))

    click.echo()
    click.echo(
        f"Summary: {len(result.errors)} error(s), {len(result.warnings)} warning(s)"
    )

    if result.errors:
        sys.exit(1)
    sys.exit(0)
