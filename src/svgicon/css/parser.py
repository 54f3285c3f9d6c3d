"""Build a stylesheet tree from CSS source using tinycss2.

Syntax example:
    .a, .b { background: svgicon(star, red); color: blue; }
    @media (min-width: 40em) { .c { background: svgicon(star); } }
"""

from __future__ import annotations

from typing import Any

import tinycss2

from svgicon.css.model import AtRule, Comment, Container, Declaration, Root, Rule
from svgicon.errors import CssSyntaxError

__all__ = ["parse_stylesheet"]

# At-rules whose block holds rules rather than declarations.
_RULE_LIST_AT_RULES = {
    "media",
    "supports",
    "document",
    "-moz-document",
    "layer",
    "container",
    "scope",
    "starting-style",
    "keyframes",
    "-webkit-keyframes",
    "-moz-keyframes",
}


def _raise_parse_error(node: Any) -> None:
    raise CssSyntaxError(
        f"Invalid CSS: {node.message}",
        line=node.source_line,
        column=node.source_column,
    )


def _convert(node: Any, parent: Container) -> None:
    """Convert one tinycss2 node and append it to *parent*."""
    kind = node.type
    if kind == "error":
        _raise_parse_error(node)
    elif kind == "comment":
        parent.append(Comment(text=node.value))
    elif kind == "declaration":
        parent.append(
            Declaration(
                prop=node.name,
                value=tinycss2.serialize(node.value).strip(),
                important=node.important,
            )
        )
    elif kind == "qualified-rule":
        rule = Rule(selector=tinycss2.serialize(node.prelude).strip())
        parent.append(rule)
        _convert_all(
            tinycss2.parse_blocks_contents(
                node.content, skip_comments=False, skip_whitespace=True
            ),
            rule,
        )
    elif kind == "at-rule":
        at_rule = AtRule(
            name=node.at_keyword,
            params=tinycss2.serialize(node.prelude).strip(),
            has_block=node.content is not None,
        )
        parent.append(at_rule)
        if node.content is None:
            return
        if node.lower_at_keyword in _RULE_LIST_AT_RULES:
            items = tinycss2.parse_rule_list(
                node.content, skip_comments=False, skip_whitespace=True
            )
        else:
            items = tinycss2.parse_blocks_contents(
                node.content, skip_comments=False, skip_whitespace=True
            )
        _convert_all(items, at_rule)


def _convert_all(nodes: list[Any], parent: Container) -> None:
    for node in nodes:
        if node.type == "whitespace":
            continue
        _convert(node, parent)


def parse_stylesheet(source: str) -> Root:
    """Parse CSS *source* into a mutable :class:`Root` tree.

    Raises CssSyntaxError on the first syntax error tinycss2 reports.
    """
    root = Root()
    _convert_all(
        tinycss2.parse_stylesheet(source, skip_comments=False, skip_whitespace=True),
        root,
    )
    return root
