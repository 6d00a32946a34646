"""stylecascade CLI entry point: Click group with subcommands."""

import logging

import click

from stylecascade import __version__


@click.group()
@click.version_option(version=__version__, prog_name="stylecascade")
@click.option("--verbose", "-v", is_flag=True, help="Log at DEBUG level")
def cli(verbose: bool) -> None:
    """stylecascade - style cascade and CSS serialization for a site builder."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from stylecascade.cli.classes import classes  # noqa: E402
from stylecascade.cli.render import render, resolve_cmd, stylesheet  # noqa: E402
from stylecascade.cli.serve import serve  # noqa: E402
from stylecascade.cli.validate import validate  # noqa: E402

cli.add_command(render)
cli.add_command(resolve_cmd)
cli.add_command(validate)
cli.add_command(stylesheet)
cli.add_command(classes)
cli.add_command(serve)
