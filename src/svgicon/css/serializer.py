"""Print a stylesheet tree back to CSS text."""

from __future__ import annotations

from svgicon.css.model import AtRule, Comment, Container, Declaration, Node, Root, Rule

__all__ = ["serialize_stylesheet"]

_INDENT = "    "


def _serialize_node(node: Node, depth: int) -> str:
    pad = _INDENT * depth
    if isinstance(node, Declaration):
        important = " !important" if node.important else ""
        return f"{pad}{node.prop}: {node.value}{important};"
    if isinstance(node, Comment):
        return f"{pad}/*{node.text}*/"
    if isinstance(node, Rule):
        return _serialize_block(f"{pad}{node.selector}", node, depth)
    if isinstance(node, AtRule):
        head = f"{pad}@{node.name} {node.params}" if node.params else f"{pad}@{node.name}"
        if not node.has_block:
            return f"{head};"
        return _serialize_block(head, node, depth)
    raise TypeError(f"Cannot serialize {type(node).__name__}")


def _serialize_block(head: str, container: Container, depth: int) -> str:
    if not container.children:
        return f"{head} {{\n{_INDENT * depth}}}"
    body = "\n".join(_serialize_node(child, depth + 1) for child in container.children)
    return f"{head} {{\n{body}\n{_INDENT * depth}}}"


def serialize_stylesheet(root: Root) -> str:
    """Return CSS text for *root*, one top-level node per paragraph."""
    if not root.children:
        return ""
    return "\n\n".join(_serialize_node(child, 0) for child in root.children) + "\n"
