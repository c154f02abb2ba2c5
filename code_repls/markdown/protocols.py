# code_repls/markdown/protocols.py

from __future__ import annotations

from enum import Enum


class Playground(Enum):
    """Online playgrounds, keyed by the pseudo-protocol that selects them."""

    BABEL = "babel://"
    CODEPEN = "codepen://"
    CODE_SANDBOX = "codesandbox://"
    RAMDA = "ramda://"

    @property
    def prefix(self) -> str:
        return self.value


def classify(url: str | None) -> tuple[Playground, str] | None:
    """
    Match a link URL against the REPL pseudo-protocols.

    Returns:
        ``(playground, remainder)`` where remainder is the URL without the
        prefix, or None if the URL is not a REPL link
    """
    if not url:
        return None
    for playground in Playground:
        if url.startswith(playground.prefix):
            return playground, url[len(playground.prefix):]
    return None
