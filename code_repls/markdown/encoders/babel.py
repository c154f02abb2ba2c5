# code_repls/markdown/encoders/babel.py

from ..compression import compress
from ..config import ReplOptions
from ..nodes import Node
from ..paths import get_file_path, read_file, verify_file
from .base import ReplLink, get_link_text

BABEL_REPL_URL = "https://babeljs.io/repl/"


def encode_babel(node: Node, reference: str, options: ReplOptions) -> ReplLink:
    """
    Embed a single example in a Babel REPL URL.

    The code is lz-string compressed into the ``code_lz`` parameter of the
    URL fragment, with the React preset enabled.
    """
    file_path = get_file_path(reference, options.directory)
    verify_file(file_path)

    code = compress(read_file(file_path))
    href = f"{BABEL_REPL_URL}#?presets=react&code_lz={code}"
    return ReplLink(href, get_link_text(node, options))
