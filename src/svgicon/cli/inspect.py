"""CLI command: svgicon inspect -- list the icon requests in a stylesheet."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from svgicon.css import parse_stylesheet
from svgicon.errors import SvgIconError
from svgicon.scanner import scan_declarations


@click.command()
@click.argument("stylesheet", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--function-name", default="svgicon", show_default=True, help="Marker function to look for"
)
def inspect(stylesheet: str, function_name: str) -> None:
    """List the icon requests found in STYLESHEET without reading any icon."""
    try:
        root = parse_stylesheet(Path(stylesheet).read_text(encoding="utf-8"))
        requests = list(scan_declarations(root, function_name))
    except SvgIconError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    for req in requests:
        color = req.color if req.color is not None else "-"
        media = req.media if req.media is not None else "-"
        click.echo(f"{req.name}\t{color}\t{media}\t{req.selector}")

    distinct = len({req.key for req in requests})
    click.echo()
    click.echo(f"Summary: {len(requests)} request(s), {distinct} distinct icon(s)")
