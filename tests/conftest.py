"""
Shared test fixtures.
"""

from pathlib import Path

import pytest

from code_repls.markdown.config import ReplOptions
from code_repls.markdown.nodes import Node

HELLO_JS = """import React from "react";

const greeting = "Hello + world / 100% & more";
console.log(greeting);
"""

APP_JS = "export default function App() {\n  return <h1>App</h1>;\n}\n"

STYLES_CSS = "h1 {\n  color: rebeccapurple;\n}\n"

NESTED_JS = "console.log('nested');\n"


@pytest.fixture
def examples_dir(tmp_path: Path) -> Path:
    """An examples directory with a few JavaScript and CSS files."""
    directory = tmp_path / "examples"
    directory.mkdir()
    (directory / "hello.js").write_text(HELLO_JS, encoding="utf-8")
    (directory / "app.js").write_text(APP_JS, encoding="utf-8")
    (directory / "styles.css").write_text(STYLES_CSS, encoding="utf-8")
    (directory / "nested").mkdir()
    (directory / "nested" / "deep.js").write_text(NESTED_JS, encoding="utf-8")
    return directory


@pytest.fixture
def options(examples_dir: Path) -> ReplOptions:
    return ReplOptions(directory=str(examples_dir))


def make_link(url: str, text: str | None = "Try it", **kwargs) -> Node:
    """A link node the way a markdown parser would produce it."""
    children = [Node(type="text", value=text)] if text is not None else []
    return Node(
        type="link",
        url=url,
        children=children,
        position={"start": {"line": 1, "column": 1}, "end": {"line": 1, "column": 20}},
        **kwargs,
    )


def make_document(*inlines: Node) -> Node:
    """Root > paragraph > inlines."""
    return Node(type="root", children=[Node(type="paragraph", children=list(inlines))])
