"""CLI command: stylecascade classes -- list and search a class registry."""

from __future__ import annotations

import json
import sys

import click

from stylecascade.cli.loading import load_registry
from stylecascade.errors import StyleEngineError
from stylecascade.schema.enums import ClassCategory


@click.command()
@click.argument("classes_file", type=click.Path(exists=True))
@click.option("--query", "-q", default=None, help="Substring to match on name, label or description")
@click.option(
    "--category",
    type=click.Choice([c.value for c in ClassCategory]),
    default=None,
    help="Only list classes in this category",
)
def classes(classes_file: str, query: str | None, category: str | None) -> None:
    """List the classes of a registry file."""
    try:
        registry = load_registry(classes_file)
    except (json.JSONDecodeError, StyleEngineError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    found = registry.search(query) if query else registry.list_all()
    if category:
        found = tuple(c for c in found if c.category == ClassCategory(category))

    for definition in found:
        parts = [f"  .{definition.name}", f'label="{definition.label}"', f"category={definition.category}"]
        if definition.description:
            parts.append(f'description="{definition.description}"')
        click.echo("  ".join(parts))
    click.echo(f"{len(found)} class(es)")
