"""
CodeSandbox encoder.

CodeSandbox's define API takes a ``parameters`` query value holding an
lz-string compressed JSON object with a ``files`` mapping keyed by file
name. Every sandbox gets a ``package.json`` with the configured dependencies
and an ``index.html`` with the configured boilerplate; the example files are
added after those, the JavaScript one always as ``index.js``.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field

from ..compression import compress
from ..config import ReplOptions
from ..nodes import Node
from ..paths import get_multiple_file_paths, read_file, verify_files
from .base import ReplLink, get_link_text

logger = logging.getLogger(__name__)

CODE_SANDBOX_DEFINE_URL = "https://codesandbox.io/api/v1/sandboxes/define"


def parse_dependencies(dependencies) -> dict[str, str]:
    """
    Turn ``name`` / ``name@version`` specifiers into a package.json mapping.

    Specifiers without a version map to ``latest``. The leading ``@`` of a
    scoped package name is not a version separator.

    Example:
        >>> parse_dependencies(["lodash@4.0.0", "ramda", "@babel/core@7"])
        {'lodash': '4.0.0', 'ramda': 'latest', '@babel/core': '7'}
    """
    parsed = {}
    for dependency in dependencies:
        name, _, version = dependency.rpartition("@")
        if not name:
            # no separator, or only the scope marker of "@scope/name"
            name, version = dependency, "latest"
        parsed[name] = version or "latest"
    return parsed


@dataclass
class SandboxParameters:
    """Builder for the CodeSandbox define API payload."""
    dependencies: dict[str, str] = field(default_factory=dict)
    html: str = ""
    files: dict[str, str] = field(default_factory=dict)

    def add_file(self, file_name: str, content: str) -> None:
        key = "index.js" if file_name.endswith(".js") else file_name
        self.files[key] = content

    def to_dict(self) -> dict:
        files = {
            "package.json": {"content": {"dependencies": self.dependencies}},
            "index.html": {"content": self.html},
        }
        for name, content in self.files.items():
            files[name] = {"content": content}
        return {"files": files}

    def to_json(self) -> str:
        # Compact separators match JSON.stringify, which the API was built around
        return json.dumps(self.to_dict(), ensure_ascii=False, separators=(",", ":"))


def encode_codesandbox(node: Node, references: str, options: ReplOptions) -> ReplLink:
    """Embed one JavaScript file plus optional CSS files in a sandbox URL."""
    files = get_multiple_file_paths(references, options.directory)
    verify_files(files)

    parameters = SandboxParameters(
        dependencies=parse_dependencies(options.dependencies),
        html=options.html,
    )
    for file in files:
        parameters.add_file(file.file_name, read_file(file.file_path))

    logger.debug(f"Sandbox files for '{references}': {', '.join(parameters.files)}")
    href = f"{CODE_SANDBOX_DEFINE_URL}?parameters={compress(parameters.to_json())}"
    return ReplLink(href, get_link_text(node, options))
