"""Stylesheet tree: Root, Rule, AtRule, Declaration and Comment nodes.

The tree is mutable. Every node knows its parent, containers own an ordered
``children`` list, and nodes can be detached with :meth:`Node.remove`.
Equality is identity so that removal never hits a look-alike sibling.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class Node:
    """Base class for every stylesheet node."""

    parent: Container | None = field(default=None, init=False, repr=False)

    def remove(self) -> None:
        """Detach this node from its parent. A detached node is left as is."""
        if self.parent is None:
            return
        self.parent.children.remove(self)
        self.parent = None

    def ancestors(self) -> Iterator[Container]:
        """Yield the parent chain, nearest first, ending at the root."""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent


@dataclass(eq=False)
class Container(Node):
    """A node that holds child nodes."""

    children: list[Node] = field(default_factory=list, init=False)

    def append(self, *nodes: Node) -> Container:
        """Append *nodes* as the last children, re-parenting them."""
        for node in nodes:
            if node.parent is not None:
                node.remove()
            node.parent = self
            self.children.append(node)
        return self

    def walk(self) -> Iterator[Node]:
        """Yield every descendant depth-first in document order."""
        for child in list(self.children):
            yield child
            if isinstance(child, Container):
                yield from child.walk()

    def walk_decls(self) -> Iterator[Declaration]:
        """Yield every descendant declaration in document order."""
        for node in self.walk():
            if isinstance(node, Declaration):
                yield node

    @property
    def declarations(self) -> list[Declaration]:
        """Direct child declarations."""
        return [c for c in self.children if isinstance(c, Declaration)]


@dataclass(eq=False)
class Root(Container):
    """The top of a stylesheet tree."""


@dataclass(eq=False)
class Rule(Container):
    """A style rule: ``selector { ... }``."""

    selector: str = ""


@dataclass(eq=False)
class AtRule(Container):
    """An at-rule such as ``@media screen { ... }`` or ``@import "x.css";``.

    ``has_block`` is False for statement at-rules, which end with ``;``.
    """

    name: str = ""
    params: str = ""
    has_block: bool = True


@dataclass(eq=False)
class Declaration(Node):
    """A ``prop: value`` pair."""

    prop: str = ""
    value: str = ""
    important: bool = False


@dataclass(eq=False)
class Comment(Node):
    text: str = ""
