"""CLI command: stylesweep optimize -- merge, filter, and minify a CSS file."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from stylesweep.cli.common import DIALECT_HELP, pick_dialect
from stylesweep.extraction import dialect_class_attributes, extract_class_names
from stylesweep.stylesheet import optimize_report


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--markup",
    "markup_file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Source file whose class names decide which rules are kept",
)
@click.option("--dialect", default=None, help=DIALECT_HELP)
@click.option(
    "--output",
    "-o",
    "output_file",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write optimized CSS here instead of stdout",
)
@click.option("--stats/--no-stats", default=True, help="Print size statistics to stderr")
def optimize(
    cssfile: str,
    markup_file: str | None,
    dialect: str | None,
    output_file: str | None,
    stats: bool,
) -> None:
    """Merge duplicate selectors and minify a CSS file.

    With --markup, selectors naming a class that the markup never uses are
    dropped (selectors with a ':' are always kept).
    """
    css = Path(cssfile).read_text(encoding="utf-8")

    used_classes = None
    if markup_file is not None:
        markup_path = Path(markup_file)
        markup = markup_path.read_text(encoding="utf-8")
        if markup.strip():
            attributes = dialect_class_attributes(pick_dialect(markup_path, dialect))
            used_classes = extract_class_names(markup, attributes)

    report = optimize_report(css, used_classes)

    if output_file is None:
        click.echo(report.output)
    else:
        Path(output_file).write_text(report.output, encoding="utf-8")

    if report.failed:
        click.echo(f"Optimization failed: {report.error}", err=True)
        sys.exit(1)

    if stats and report.stats is not None:
        s = report.stats
        click.echo(
            f"Original: {s.original_size} bytes, optimized: {s.optimized_size} bytes "
            f"({s.reduction:.1f}% reduction)",
            err=True,
        )
        if s.used_class_count is not None:
            click.echo(f"Used classes: {s.used_class_count}", err=True)
