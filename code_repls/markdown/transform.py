"""
REPL link transform.

Walks a markdown tree and rewrites every link whose URL uses one of the REPL
pseudo-protocols into an anchor pointing at the matching playground:

    [Try it](babel://hello-world)  →  <a href="https://babeljs.io/repl/#?…">Try it</a>

Any configuration or file error aborts the whole pass; there are no partial
results.
"""

from __future__ import annotations

import logging

from .config import ReplOptions, validate_options
from .encoders import ENCODERS
from .nodes import LINK, Node, map_tree
from .protocols import classify
from .rewriter import convert_node_to_link

logger = logging.getLogger(__name__)


def transform_link(node: Node, options: ReplOptions) -> Node:
    """
    Rewrite a single node if it is a REPL link.

    Expects options already passed through :func:`validate_options`.
    Non-link nodes and links to anything else are returned as is.
    """
    if node.type != LINK:
        return node

    match = classify(node.url)
    if match is None:
        return node

    playground, reference = match
    logger.debug(f"Rewriting {playground.name} link '{node.url}'")
    link = ENCODERS[playground](node, reference, options)
    return convert_node_to_link(node, link.text, link.href, options.target)


def code_repls(tree: Node, options: ReplOptions) -> Node:
    """
    Rewrite all REPL links in a markdown tree.

    Args:
        tree: Root node of the document (left unmodified)
        options: REPL options; validated before the tree is walked

    Returns:
        The transformed tree

    Raises:
        ConfigError: If the examples directory is missing or invalid
        ValidationError: If a CodeSandbox link names two JavaScript files
        FileNotFoundError: If a referenced example does not exist
    """
    options = validate_options(options)
    return map_tree(tree, lambda node, index, parent: transform_link(node, options))
