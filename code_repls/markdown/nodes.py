"""
Document tree for REPL link rewriting.

Nodes follow the mdast shape (``type``, ``children``, ``value``, ``url``,
``title``, ``position``) so trees can be exchanged as JSON with markdown
tooling that speaks mdast. Properties this module does not model are kept
in ``extra`` and written back unchanged.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field, replace
from typing import Any

LINK = "link"
TEXT = "text"
RAW_HTML = "html"

_MODELLED_KEYS = ("type", "children", "value", "url", "title", "position")


@dataclass
class Node:
    """A node in the markdown tree."""
    type: str
    children: list[Node] | None = None
    value: str | None = None
    url: str | None = None
    title: str | None = None
    position: dict | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict) -> Node:
        """Build a tree from an mdast JSON object."""
        children = data.get("children")
        return cls(
            type=data["type"],
            children=[cls.from_dict(child) for child in children] if children is not None else None,
            value=data.get("value"),
            url=data.get("url"),
            title=data.get("title"),
            position=data.get("position"),
            extra={k: v for k, v in data.items() if k not in _MODELLED_KEYS},
        )

    def to_dict(self) -> dict:
        """Serialise back to an mdast JSON object, omitting unset fields."""
        data: dict[str, Any] = {"type": self.type}
        data.update(self.extra)
        if self.children is not None:
            data["children"] = [child.to_dict() for child in self.children]
        for key in ("value", "url", "title", "position"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        return data

    def depth_first(self) -> Iterator[Node]:
        """Traverse tree depth-first, yielding self then children."""
        yield self
        for child in self.children or ():
            yield from child.depth_first()

    def text(self) -> str:
        """Concatenated literal text of this node and its descendants."""
        return "".join(node.value for node in self.depth_first() if node.value is not None)


Visitor = Callable[[Node, "int | None", "Node | None"], Node]


def map_tree(tree: Node, visitor: Visitor) -> Node:
    """
    Produce a new tree by passing every node through ``visitor``.

    Nodes are visited once each, parent before children and siblings in
    order. The visitor's return value replaces the node, and it is the
    children of that returned node that are visited next.

    Args:
        tree: Root of the input tree (left unmodified)
        visitor: Called as ``visitor(node, index, parent)``; index and
            parent are None for the root

    Returns:
        Root of the new tree
    """

    def preorder(node: Node, index: int | None, parent: Node | None) -> Node:
        new_node = visitor(node, index, parent)
        if new_node.children is None:
            return new_node
        children = [preorder(child, i, new_node) for i, child in enumerate(new_node.children)]
        return replace(new_node, children=children)

    return preorder(tree, None, None)
