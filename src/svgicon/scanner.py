"""Declaration scanner: find marker declarations and turn them into requests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from svgicon.cache import IconKey
from svgicon.css.model import AtRule, Container, Declaration, Rule
from svgicon.errors import MalformedMarkerError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IconRequest:
    """One marker declaration, resolved to an icon identity."""

    name: str
    color: str | None
    media: str | None
    selector: str
    declaration: Declaration

    @property
    def key(self) -> IconKey:
        return (self.name, self.color, self.media)


def parse_marker_arguments(value: str) -> tuple[str, str | None]:
    """Extract ``(name, color)`` from a marker call inside *value*.

    Uses the text between the first ``(`` and the last ``)``, split on
    commas. Each field loses at most one leading space; nothing else is
    trimmed. A missing second field means no colour.
    """
    start = value.find("(")
    end = value.rfind(")")
    if start == -1 or end <= start:
        raise MalformedMarkerError(
            f"Cannot find an argument list in {value!r}", value=value
        )
    fields = [f[1:] if f.startswith(" ") else f for f in value[start + 1 : end].split(",")]
    name = fields[0]
    if not name:
        raise MalformedMarkerError(f"Missing icon name in {value!r}", value=value)
    color = fields[1] if len(fields) > 1 else None
    return name, color


def media_context(node: Declaration) -> str | None:
    """Return the params of the outermost enclosing ``@media``, or None."""
    media = None
    for ancestor in node.ancestors():
        if isinstance(ancestor, AtRule) and ancestor.name.lower() == "media":
            # Keep overwriting on the way up: the outermost one wins.
            media = ancestor.params
    return media


def is_marker(declaration: Declaration, function_name: str) -> bool:
    return function_name in declaration.value


def scan_declarations(root: Container, function_name: str) -> Iterator[IconRequest]:
    """Yield an IconRequest for every marker declaration, in tree order.

    The tree is not modified.
    """
    for decl in root.walk_decls():
        if not is_marker(decl, function_name):
            continue
        name, color = parse_marker_arguments(decl.value)
        parent = decl.parent
        if not isinstance(parent, Rule):
            raise MalformedMarkerError(
                f"{function_name}() used outside a style rule in {decl.prop}: {decl.value}",
                value=decl.value,
            )
        request = IconRequest(
            name=name,
            color=color,
            media=media_context(decl),
            selector=parent.selector,
            declaration=decl,
        )
        logger.debug(
            "Found icon request name=%r color=%r media=%r selector=%r",
            request.name,
            request.color,
            request.media,
            request.selector,
        )
        yield request


def remove_declaration(decl: Declaration) -> None:
    """Remove *decl*, and its rule too when nothing but comments remain."""
    parent = decl.parent
    decl.remove()
    if not isinstance(parent, Rule):
        return
    if any(isinstance(child, (Declaration, Container)) for child in parent.children):
        return
    parent.remove()
