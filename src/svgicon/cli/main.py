"""svgicon CLI entry point: Click group with subcommands."""

import logging

import click

from svgicon import __version__


@click.group()
@click.version_option(version=__version__, prog_name="svgicon")
@click.option("-v", "--verbose", is_flag=True, help="Log every icon request")
def cli(verbose: bool) -> None:
    """svgicon - inline recoloured SVG icons into stylesheets."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from svgicon.cli.build import build  # noqa: E402
from svgicon.cli.inspect import inspect  # noqa: E402

cli.add_command(build)
cli.add_command(inspect)
