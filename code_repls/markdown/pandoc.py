"""
Apply the REPL link transform to a Pandoc JSON AST.

Pandoc represents a link as ``{"t": "Link", "c": [attr, inlines, [url,
title]]}``. Each link is turned into a :class:`Node`, passed through
:func:`transform_link`, and replaced by a ``RawInline`` HTML element when it
was rewritten.
"""

from __future__ import annotations

import logging

from .config import ReplOptions, validate_options
from .nodes import LINK, RAW_HTML, TEXT, Node
from .transform import transform_link

logger = logging.getLogger(__name__)

_SPACES = {"Space", "SoftBreak", "LineBreak"}
_LITERALS = {"Str", "Code", "Math", "RawInline"}


def walk(value, action):
    """
    Walk a Pandoc AST, replacing elements with ``action(element)``.

    Elements are visited parent first. When the action returns None the
    element is kept and its contents are walked; otherwise the returned
    element is walked in its place.
    """
    if isinstance(value, list):
        result = []
        for item in value:
            if isinstance(item, dict) and "t" in item:
                replacement = action(item)
                result.append(walk(item if replacement is None else replacement, action))
            else:
                result.append(walk(item, action))
        return result
    if isinstance(value, dict):
        return {key: walk(item, action) for key, item in value.items()}
    return value


def stringify(value) -> str:
    """Plain text of a Pandoc element or list of elements."""
    if isinstance(value, list):
        return "".join(stringify(item) for item in value)
    if not isinstance(value, dict):
        return ""

    kind = value.get("t")
    if kind in _SPACES:
        return " "
    if kind in _LITERALS:
        content = value["c"]
        return content if isinstance(content, str) else content[-1]
    return stringify(value.get("c", []))


def link_to_node(element: dict) -> Node:
    _attr, inlines, (url, title) = element["c"]
    text = stringify(inlines)
    return Node(
        type=LINK,
        url=url,
        title=title or None,
        children=[Node(type=TEXT, value=text)] if inlines else [],
    )


def apply_code_repls(ast: dict, options: ReplOptions) -> dict:
    """
    Rewrite REPL links in a Pandoc JSON document.

    Args:
        ast: Document as produced by ``pandoc --to json``
        options: REPL options; validated before the document is walked

    Returns:
        New document with REPL links replaced by raw HTML anchors
    """
    options = validate_options(options)

    def action(element):
        if element["t"] != "Link":
            return None
        node = transform_link(link_to_node(element), options)
        if node.type != RAW_HTML:
            return None
        return {"t": "RawInline", "c": ["html", node.value]}

    return walk(ast, action)
