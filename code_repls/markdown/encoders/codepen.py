# code_repls/markdown/encoders/codepen.py

from ..config import ReplOptions
from ..nodes import Node
from ..paths import get_file_path, verify_file
from .base import ReplLink, get_link_text

# Pages under this path POST the example to CodePen, see code_repls.redirects
CODEPEN_REDIRECT_PATH = "/redirect-to-codepen/"


def encode_codepen(node: Node, reference: str, options: ReplOptions) -> ReplLink:
    """
    Point a CodePen link at its generated redirect page.

    CodePen only accepts examples through a POST form, so nothing is embedded
    in the URL; the referenced file must still exist.
    """
    verify_file(get_file_path(reference, options.directory))

    href = f"{CODEPEN_REDIRECT_PATH}{reference}"
    return ReplLink(href, get_link_text(node, options))
