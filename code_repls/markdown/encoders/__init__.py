# code_repls/markdown/encoders/__init__.py

from ..protocols import Playground
from .babel import encode_babel
from .base import ReplLink, get_link_text
from .codepen import encode_codepen
from .codesandbox import SandboxParameters, encode_codesandbox, parse_dependencies
from .ramda import encode_ramda

ENCODERS = {
    Playground.BABEL: encode_babel,
    Playground.CODEPEN: encode_codepen,
    Playground.CODE_SANDBOX: encode_codesandbox,
    Playground.RAMDA: encode_ramda,
}

__all__ = [
    "ENCODERS",
    "ReplLink",
    "SandboxParameters",
    "encode_babel",
    "encode_codepen",
    "encode_codesandbox",
    "encode_ramda",
    "get_link_text",
    "parse_dependencies",
]
