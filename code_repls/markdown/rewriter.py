# code_repls/markdown/rewriter.py

from __future__ import annotations

from .nodes import RAW_HTML, Node


def convert_node_to_link(node: Node, text: str, href: str, target: str | None = None) -> Node:
    """
    Replace a link node with a raw HTML anchor.

    The returned node keeps none of the link's url, children, title or
    position; properties outside the mdast link shape are carried over.

    Args:
        node: The link node being replaced (not modified)
        text: Anchor text
        href: Playground URL
        target: Optional target attribute, paired with rel="noreferrer"

    Returns:
        New node of type "html"
    """
    target = f'target="{target}" rel="noreferrer"' if target else ""
    return Node(
        type=RAW_HTML,
        value=f'<a href="{href}" {target}>{text}</a>',
        extra=dict(node.extra),
    )
