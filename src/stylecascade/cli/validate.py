"""CLI command: stylecascade validate -- check a stored document against the schema."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from stylecascade.cli.loading import load_elements, load_registry, read_json
from stylecascade.errors import StyleEngineError
from stylecascade.schema.codec import bundle_from_dict, element_from_dict, theme_from_dict

_LOADERS = {
    "bundle": lambda path: bundle_from_dict(read_json(path)),
    "element": lambda path: element_from_dict(read_json(path)),
    "elements": load_elements,
    "theme": lambda path: theme_from_dict(read_json(path)),
    "classes": load_registry,
}


@click.command()
@click.argument("document", type=click.Path(exists=True))
@click.option(
    "--kind",
    type=click.Choice(sorted(_LOADERS)),
    default="bundle",
    show_default=True,
    help="What the document holds",
)
def validate(document: str, kind: str) -> None:
    """Load a stored document and report schema violations.

    Exits with code 0 if the document is valid, or code 1 with the path of
    the offending field.
    """
    name = Path(document).name
    try:
        _LOADERS[kind](document)
    except json.JSONDecodeError as exc:
        click.echo(f"Invalid JSON: {exc}", err=True)
        sys.exit(1)
    except StyleEngineError as exc:
        click.echo(f"Error: {exc}", err=True)
        if exc.path:
            click.echo(f"Path:  {exc.path}", err=True)
        sys.exit(1)

    click.echo(f"OK: {name} is a valid {kind} document")
