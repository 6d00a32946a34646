"""CLI commands: stylecascade render / resolve / stylesheet -- produce CSS."""

from __future__ import annotations

import json
import sys

import click

from stylecascade.cascade import ResolveContext, provenance_to_dict, resolve
from stylecascade.cli.loading import (
    load_elements,
    load_registry,
    load_theme,
    log_missing_classes,
    read_json,
)
from stylecascade.css import declarations_block, generate_stylesheet, to_css_properties
from stylecascade.errors import StyleEngineError, UnknownClassReferenceError
from stylecascade.schema.codec import bundle_from_dict, element_from_dict
from stylecascade.schema.enums import Breakpoint, InteractionState


@click.command()
@click.argument("bundle_file", type=click.Path(exists=True))
@click.option("--json", "as_json", is_flag=True, help="Print the property map as JSON")
def render(bundle_file: str, as_json: bool) -> None:
    """Serialize a style bundle to CSS declarations (no cascade)."""
    try:
        bundle = bundle_from_dict(read_json(bundle_file))
    except (json.JSONDecodeError, StyleEngineError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    props = to_css_properties(bundle)
    if as_json:
        click.echo(json.dumps(props, indent=2))
    elif props:
        click.echo(declarations_block(props, indent=""))


@click.command("resolve")
@click.argument("element_file", type=click.Path(exists=True))
@click.option("--classes", "classes_file", type=click.Path(exists=True), help="Class registry JSON")
@click.option("--theme", "theme_file", type=click.Path(exists=True), help="Global theme JSON")
@click.option(
    "--breakpoint",
    type=click.Choice([b.value for b in Breakpoint]),
    default=Breakpoint.DESKTOP.value,
    show_default=True,
    help="Active breakpoint",
)
@click.option(
    "--state",
    type=click.Choice([s.value for s in InteractionState]),
    default=InteractionState.DEFAULT.value,
    show_default=True,
    help="Active interaction state",
)
@click.option("--provenance", is_flag=True, help="Also print where each value came from")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
def resolve_cmd(
    element_file: str,
    classes_file: str | None,
    theme_file: str | None,
    breakpoint: str,
    state: str,
    provenance: bool,
    as_json: bool,
) -> None:
    """Run the cascade for one element and print its effective CSS.

    Class references missing from the registry are logged as warnings and
    skipped.
    """
    try:
        element = element_from_dict(read_json(element_file))
        registry = load_registry(classes_file)
        theme = load_theme(theme_file)
    except (json.JSONDecodeError, StyleEngineError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    context = ResolveContext(
        breakpoint=Breakpoint(breakpoint),
        state=InteractionState(state),
        global_theme=theme,
        registry=registry,
    )
    result = resolve(element, context)
    log_missing_classes(element.element_id, result.missing_classes)
    props = to_css_properties(result.bundle)

    if as_json:
        out = {"css": props, "warnings": [str(e) for e in result.missing_classes]}
        if provenance:
            out["provenance"] = provenance_to_dict(result.provenance)
        click.echo(json.dumps(out, indent=2))
        return

    if props:
        click.echo(declarations_block(props, indent=""))
    if provenance:
        click.echo()
        click.echo("Provenance:")
        for path, entry in sorted(result.provenance.items()):
            parts = [f"  {path}: {entry.source}"]
            if entry.class_name:
                parts.append(f"class={entry.class_name}")
            if entry.is_responsive:
                parts.append("responsive")
            if entry.cleared:
                parts.append("cleared")
            click.echo(" ".join(parts))


@click.command()
@click.argument("elements_file", type=click.Path(exists=True))
@click.option("--classes", "classes_file", type=click.Path(exists=True), help="Class registry JSON")
def stylesheet(elements_file: str, classes_file: str | None) -> None:
    """Generate the stylesheet for a list of elements and their classes."""
    try:
        elements = load_elements(elements_file)
        registry = load_registry(classes_file)
    except (json.JSONDecodeError, StyleEngineError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    for element in elements:
        log_missing_classes(
            element.element_id,
            [
                UnknownClassReferenceError(name, index)
                for index, name in enumerate(element.applied_classes)
                if name not in registry
            ],
        )
    click.echo(generate_stylesheet(registry, elements), nl=False)
