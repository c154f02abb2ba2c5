# code_repls/markdown/paths.py
"""
Resolve REPL link references to files in the examples directory.

References are relative to the configured directory; the ``.js`` extension
may be left out. Paths are normalised to forward slashes so generated paths
look the same on every platform.
"""

from __future__ import annotations

import logging
import os
import posixpath
from typing import NamedTuple

from .errors import ValidationError

logger = logging.getLogger(__name__)


class FileReference(NamedTuple):
    file_name: str  # base name, used as the key in multi-file sandboxes
    file_path: str  # normalised path inside the examples directory


def normalize_path(path: str) -> str:
    """Collapse ``.``/``..`` segments and use forward slashes."""
    return posixpath.normpath(path.replace("\\", "/"))


def get_file_path(reference: str, directory: str) -> str:
    """
    Resolve a single-file reference.

    Args:
        reference: Link URL with the pseudo-protocol already removed
        directory: Examples directory (validated, ends with a slash)

    Returns:
        Normalised path of the referenced ``.js`` file
    """
    if not reference.endswith(".js"):
        reference += ".js"
    return normalize_path(os.path.join(directory, reference))


def get_multiple_file_paths(references: str, directory: str) -> list[FileReference]:
    """
    Resolve a comma separated list of references.

    Each reference without a ``.js`` or ``.css`` extension gets ``.js``
    appended. Only one reference may be spelled with a ``.js`` extension.

    Raises:
        ValidationError: If more than one reference ends in ``.js``
    """
    files = []
    has_js_file = False
    for reference in references.split(","):
        is_js_file = reference.endswith(".js")
        if not is_js_file and not reference.endswith(".css"):
            reference += ".js"
        if is_js_file:
            if has_js_file:
                raise ValidationError(
                    f'There can only be a single JavaScript file in multiple files "{references}"'
                )
            has_js_file = True

        files.append(
            FileReference(
                file_name=reference.split("/")[-1],
                file_path=normalize_path(os.path.join(directory, reference)),
            )
        )
    return files


def verify_file(path: str) -> None:
    """Raise FileNotFoundError if ``path`` does not exist."""
    if not os.path.exists(path):
        raise FileNotFoundError(f'Invalid REPL link specified; no such file "{path}"')


def verify_files(files: list[FileReference]) -> None:
    for file in files:
        verify_file(file.file_path)


def read_file(path: str) -> str:
    logger.debug(f"Reading REPL example {path}")
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()
