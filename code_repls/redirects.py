"""
CodePen redirect pages.

CodePen only accepts prefilled pens through a POST to its define endpoint,
so ``codepen://`` links point at ``/redirect-to-codepen/<example>`` instead.
This module generates those pages: one per ``.js`` example, each a
form holding the pen definition that submits itself on load.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from bs4 import BeautifulSoup

from .markdown.config import ReplOptions, validate_options
from .markdown.encoders.codepen import CODEPEN_REDIRECT_PATH
from .markdown.paths import read_file

logger = logging.getLogger(__name__)

CODEPEN_DEFINE_URL = "https://codepen.io/pen/define"
EXAMPLE_EXTENSIONS = (".js",)


@dataclass(frozen=True)
class RedirectPage:
    path: str  # site-relative, without leading slash
    action: str
    payload: str  # JSON pen definition posted as "data"


def codepen_payload(code: str, options: ReplOptions) -> str:
    """Pen definition for CodePen's prefill API."""
    data = {
        "title": "example",
        "editors": "0010",
        "html": options.html,
        "js_external": ";".join(options.externals),
        "js_pre_processor": "babel",
        "js": code,
    }
    return json.dumps(data)


def collect_codepen_redirects(options: ReplOptions) -> list[RedirectPage]:
    """
    Build a redirect page for every example in the options' directory.

    Args:
        options: REPL options; ``directory``, ``html`` and ``externals`` are used

    Returns:
        Pages sorted by path; empty (with a warning) if there are no examples
    """
    options = validate_options(options)
    directory = Path(options.directory)
    prefix = CODEPEN_REDIRECT_PATH.strip("/")

    pages = []
    for file in sorted(directory.rglob("*")):
        if not file.is_file() or file.suffix not in EXAMPLE_EXTENSIONS:
            continue
        slug = file.relative_to(directory).with_suffix("").as_posix()
        pages.append(
            RedirectPage(
                path=f"{prefix}/{slug}",
                action=CODEPEN_DEFINE_URL,
                payload=codepen_payload(read_file(str(file)), options),
            )
        )

    if not pages:
        logger.warning(f'No example files found in "{options.directory}"')
    return pages


def render_redirect_page(page: RedirectPage) -> str:
    """Render a self-submitting form for ``page`` as an HTML document."""
    soup = BeautifulSoup("<!DOCTYPE html><html><head></head><body></body></html>", "html.parser")

    soup.head.append(soup.new_tag("meta", attrs={"charset": "utf-8"}))
    title = soup.new_tag("title")
    title.string = "Redirecting to CodePen"
    soup.head.append(title)

    form = soup.new_tag("form", attrs={"id": "form", "action": page.action, "method": "POST"})
    form.append(soup.new_tag("input", attrs={"type": "hidden", "name": "data", "value": page.payload}))
    noscript = soup.new_tag("noscript")
    button = soup.new_tag("button", attrs={"type": "submit"})
    button.string = "Open in CodePen"
    noscript.append(button)
    form.append(noscript)
    soup.body.append(form)

    script = soup.new_tag("script")
    script.string = 'document.getElementById("form").submit();'
    soup.body.append(script)

    return str(soup)


def write_redirect_pages(pages: list[RedirectPage], output_dir: str | Path) -> list[Path]:
    """
    Write each page to ``<output_dir>/<page.path>/index.html``.

    Returns:
        Paths of the written files
    """
    output_dir = Path(output_dir)
    written = []
    for page in pages:
        target = output_dir / page.path / "index.html"
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(render_redirect_page(page), encoding="utf-8")
        written.append(target)
    logger.info(f"Wrote {len(written)} CodePen redirect pages to {output_dir}")
    return written
