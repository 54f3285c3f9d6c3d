"""CLI command: svgicon build -- inline icons into a stylesheet."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from svgicon.config import SvgIconConfig
from svgicon.errors import SvgIconError
from svgicon.transform import process_file


@click.command()
@click.argument("stylesheet", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the result here instead of stdout",
)
@click.option("--path", "icon_path", default="./svgs", show_default=True, help="Icon directory")
@click.option("--prefix", default="", help="Icon file name prefix")
@click.option(
    "--function-name", default="svgicon", show_default=True, help="Marker function to replace"
)
@click.option("--strip-styles", is_flag=True, help="Drop the first <style> block of each icon")
@click.option("--workers", type=int, default=None, help="Icon rendering threads")
def build(
    stylesheet: str,
    output: str | None,
    icon_path: str,
    prefix: str,
    function_name: str,
    strip_styles: bool,
    workers: int | None,
) -> None:
    """Replace svgicon() declarations in STYLESHEET with inline icon rules.

    Exits with code 1 and writes nothing if any icon cannot be read or parsed.
    """
    try:
        config = SvgIconConfig(
            path=icon_path,
            prefix=prefix,
            function_name=function_name,
            strip_styles=strip_styles,
            max_workers=workers,
        )
        css = process_file(stylesheet, config)
    except (SvgIconError, ValueError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if output is None:
        click.echo(css, nl=False)
        return
    Path(output).write_text(css, encoding="utf-8")
    click.echo(f"Wrote {output}", err=True)
