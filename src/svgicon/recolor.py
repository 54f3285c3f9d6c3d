"""Icon recolouring: rewrite fills, serialise, and build the CSS value."""

from __future__ import annotations

import re
from collections.abc import Iterable
from xml.etree import ElementTree as ET

from svgicon import markup

DATA_URI_PREFIX = "data:image/svg+xml;charset=utf-8,"

# Removes a single span, from the first "<style" to the first "style>" after
# it. Not nesting-aware.
_STYLE_BLOCK_RE = re.compile(r"<style.*?style>")

DEFAULT_COLORABLE_TAGS = ("path", "polygon")


def recolor_tree(
    root: ET.Element,
    color: str | None,
    colorable_tags: Iterable[str] = DEFAULT_COLORABLE_TAGS,
) -> ET.Element:
    """Set ``fill`` to *color* on every colourable element, in place.

    All matching elements are rewritten at any depth, *root* included.
    Without a colour the tree keeps its own fills.
    """
    if not color:
        return root
    tags = set(colorable_tags)
    for element in root.iter():
        if markup.local_name(element.tag) in tags:
            element.set("fill", color)
    return root


def strip_style_block(text: str) -> str:
    return _STYLE_BLOCK_RE.sub("", text, count=1)


def render_markup(
    root: ET.Element,
    color: str | None,
    *,
    colorable_tags: Iterable[str] = DEFAULT_COLORABLE_TAGS,
    strip_styles: bool = False,
) -> str:
    """Recolour *root* and return compact single-line markup."""
    recolor_tree(root, color, colorable_tags)
    text = markup.remove_newlines(markup.minify(markup.encode(root)))
    if strip_styles:
        text = strip_style_block(text)
    return text


def to_css_value(svg: str) -> str:
    """Wrap markup in a ``url('data:...')`` value.

    The markup is embedded verbatim, so it must not contain single quotes.
    """
    return f"url('{DATA_URI_PREFIX}{svg}')"


def recolor_icon(
    text: str,
    color: str | None,
    *,
    source: str = "<string>",
    colorable_tags: Iterable[str] = DEFAULT_COLORABLE_TAGS,
    strip_styles: bool = False,
) -> str:
    """Decode icon markup, recolour it and return the CSS property value.

    Raises MarkupParseError when *text* is not well-formed.
    """
    root = markup.decode(text, source=source)
    svg = render_markup(
        root, color, colorable_tags=colorable_tags, strip_styles=strip_styles
    )
    return to_css_value(svg)
