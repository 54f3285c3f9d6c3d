"""Markup codec: SVG text to an ElementTree element tree and back."""

from __future__ import annotations

import re
from xml.etree import ElementTree as ET

from svgicon.errors import MarkupParseError

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"

# Without these, a default-namespace SVG is written back as <ns0:svg ...>.
ET.register_namespace("", SVG_NS)
ET.register_namespace("xlink", XLINK_NS)

_COMMENT_RE = re.compile(r"<!--.*?-->", re.DOTALL)
_BETWEEN_TAGS_RE = re.compile(r">\s+<")
_NEWLINE_RE = re.compile(r"\r\n|\n|\r")


def decode(text: str, source: str = "<string>") -> ET.Element:
    """Parse markup *text* into an element tree.

    *source* names the text in error messages, usually the icon file path.
    """
    try:
        return ET.fromstring(text.lstrip("\ufeff"))
    except ET.ParseError as exc:
        line, column = exc.position
        raise MarkupParseError(
            f"Invalid markup in {source}: {exc}",
            source=source,
            line=line,
            column=column,
            cause=exc,
        ) from exc


def encode(element: ET.Element) -> str:
    """Serialize *element* without an XML declaration.

    Empty elements are written as ``<tag attr="x"/>``.
    """
    # ElementTree escapes ">" inside attributes and text, so " />" only
    # occurs at the end of an empty element.
    return ET.tostring(element, encoding="unicode").replace(" />", "/>")


def local_name(tag: object) -> str:
    """Return *tag* without its ``{namespace}`` part."""
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def minify(text: str) -> str:
    """Drop comments and the whitespace between tags."""
    text = _COMMENT_RE.sub("", text)
    return _BETWEEN_TAGS_RE.sub("><", text).strip()


def remove_newlines(text: str) -> str:
    return _NEWLINE_RE.sub("", text)
