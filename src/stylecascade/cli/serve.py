"""CLI command: stylecascade serve -- run the HTTP preview API."""

from __future__ import annotations

import json
import sys

import click

from stylecascade.config import CascadeConfig
from stylecascade.errors import StyleEngineError

_DEFAULTS = CascadeConfig()


@click.command()
@click.option("--host", default=_DEFAULTS.host, help="Host to bind to")
@click.option("--port", default=_DEFAULTS.port, type=int, help="Port to bind to")
@click.option("--classes", "classes_file", type=click.Path(exists=True), help="Class registry JSON to preload")
@click.option("--theme", "theme_file", type=click.Path(exists=True), help="Global theme JSON")
@click.option("--debug/--no-debug", default=False, help="Enable debug mode")
def serve(
    host: str,
    port: int,
    classes_file: str | None,
    theme_file: str | None,
    debug: bool,
) -> None:
    """Start the style preview web server."""
    from stylecascade.cli.loading import load_registry, load_theme
    from stylecascade.web.app import create_app

    try:
        registry = load_registry(classes_file)
        theme = load_theme(theme_file)
    except (json.JSONDecodeError, StyleEngineError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    config = CascadeConfig(host=host, port=port)
    app = create_app(registry=registry, config=config, theme=theme)
    click.echo(f"Starting stylecascade on {host}:{port}")
    app.run(host=host, port=port, debug=debug)
