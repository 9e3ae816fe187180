"""Stylesweep CLI entry point: Click group with subcommands."""

import logging

import click

from stylesweep import __version__
from stylesweep.cli.common import load_config

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@click.group()
@click.version_option(version=__version__, prog_name="stylesweep")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging verbosity [default: STYLESWEEP_LOG_LEVEL or WARNING]",
)
def cli(log_level: str | None) -> None:
    """Stylesweep - syntax checks for web sources and CSS cleanup."""
    level = (log_level or load_config().log_level).upper()
    if level not in LOG_LEVELS:
        raise click.UsageError(
            f"STYLESWEEP_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {level!r}"
        )
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    # basicConfig is a no-op once the root logger has handlers.
    logging.getLogger("stylesweep").setLevel(level)


# Import and register subcommands
from stylesweep.cli.validate import validate  # noqa: E402
from stylesweep.cli.optimize import optimize  # noqa: E402
from stylesweep.cli.classes import classes, dialects  # noqa: E402
from stylesweep.cli.serve import serve  # noqa: E402

cli.add_command(validate)
cli.add_command(optimize)
cli.add_command(classes)
cli.add_command(dialects)
cli.add_command(serve)
