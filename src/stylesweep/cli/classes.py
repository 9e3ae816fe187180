"""CLI commands: stylesweep classes / dialects -- inspect inputs and registry."""

from __future__ import annotations

from pathlib import Path

import click

from stylesweep.cli.common import DIALECT_HELP, pick_dialect
from stylesweep.extraction import dialect_class_attributes, extract_class_names
from stylesweep.model.dialect import DIALECTS


@click.command()
@click.argument("sourcefile", type=click.Path(exists=True, dir_okay=False))
@click.option("--dialect", default=None, help=DIALECT_HELP)
def classes(sourcefile: str, dialect: str | None) -> None:
    """List the class names a source file uses, one per line."""
    source_path = Path(sourcefile)
    attributes = dialect_class_attributes(pick_dialect(source_path, dialect))
    found = extract_class_names(source_path.read_text(encoding="utf-8"), attributes)
    for name in sorted(found):
        click.echo(name)


@click.command()
def dialects() -> None:
    """List supported dialects."""
    for config in DIALECTS.values():
        click.echo(f"{config.id.value:<6} {config.id.long_id:<15} {config.display_name}")
