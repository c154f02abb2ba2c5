# code_repls/markdown/renderer.py

import json
import logging

import pypandoc

from .config import get_pandoc_config
from .pandoc import apply_code_repls

logger = logging.getLogger(__name__)


def render_markdown(text, options):
    """
    Render markdown to HTML with REPL links rewritten, using pypandoc

    Args:
        text: Raw markdown text
        options: ReplOptions for the REPL link pass
    """
    pandoc_config = get_pandoc_config()

    # Markdown to Pandoc's JSON AST
    ast = json.loads(
        pypandoc.convert_text(
            text,
            to="json",
            format=pandoc_config["format"],
            extra_args=pandoc_config["extra_args"],
        )
    )

    ast = apply_code_repls(ast, options)

    # JSON AST to HTML
    html = pypandoc.convert_text(
        json.dumps(ast),
        to="html5",
        format="json",
        extra_args=pandoc_config["extra_args"],
    )
    logger.debug(f"Rendered {len(text)} characters of markdown")
    return html
