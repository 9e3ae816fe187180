"""CLI command: stylesweep serve -- run the JSON web API."""

from __future__ import annotations

import dataclasses

import click

from stylesweep.cli.common import load_config


@click.command()
@click.option("--host", default=None, help="Host to bind to")
@click.option("--port", default=None, type=int, help="Port to bind to")
@click.option("--debug/--no-debug", default=False, help="Enable debug mode")
def serve(host: str | None, port: int | None, debug: bool) -> None:
    """Start the Stylesweep web server."""
    from stylesweep.web.app import create_app

    config = load_config()
    overrides = {k: v for k, v in (("host", host), ("port", port)) if v is not None}
    config = dataclasses.replace(config, **overrides)

    app = create_app(config=config)
    click.echo(f"Starting Stylesweep on {config.host}:{config.port}")
    app.run(host=config.host, port=config.port, debug=debug)
