# code_repls/markdown/encoders/ramda.py

from urllib.parse import quote

from ..config import ReplOptions
from ..nodes import Node
from ..paths import get_file_path, read_file, verify_file
from .base import ReplLink, get_link_text

RAMDA_REPL_URL = "http://ramdajs.com/repl/"


def encode_ramda(node: Node, reference: str, options: ReplOptions) -> ReplLink:
    """
    Embed a single example in a Ramda REPL URL.

    The Ramda REPL does not understand lz-string; it reads the fragment as a
    percent-encoded URI component.
    """
    file_path = get_file_path(reference, options.directory)
    verify_file(file_path)

    code = quote(read_file(file_path), safe="")
    href = f"{RAMDA_REPL_URL}#?{code}"
    return ReplLink(href, get_link_text(node, options))
