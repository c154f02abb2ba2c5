# code_repls/markdown/encoders/base.py

from __future__ import annotations

from typing import NamedTuple

from ..config import ReplOptions
from ..nodes import Node


class ReplLink(NamedTuple):
    """Where a rewritten REPL link points and what it says."""
    href: str
    text: str


def get_link_text(node: Node, options: ReplOptions) -> str:
    """First child's text, or the configured default for links without children."""
    if not node.children:
        return options.default_text
    return node.children[0].text()
