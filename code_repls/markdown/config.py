# code_repls/markdown/config.py

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, replace
from pathlib import Path

import yaml

from .errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_LINK_TEXT = "REPL"
DEFAULT_HTML = '<div id="root"></div>'

# YAML keys accepted by load_options, including the camelCase spellings used
# by existing site configurations
_OPTION_KEYS = {
    "default_text": "default_text",
    "defaultText": "default_text",
    "dependencies": "dependencies",
    "directory": "directory",
    "html": "html",
    "target": "target",
    "externals": "externals",
}


@dataclass(frozen=True)
class ReplOptions:
    """Options for a single REPL link rewriting pass."""

    directory: str | None = None
    default_text: str = DEFAULT_LINK_TEXT
    dependencies: tuple[str, ...] = field(default_factory=tuple)
    html: str = DEFAULT_HTML
    target: str | None = None
    externals: tuple[str, ...] = field(default_factory=tuple)


def validate_options(options: ReplOptions) -> ReplOptions:
    """
    Check the examples directory and normalise it to end with a slash.

    Args:
        options: Options as given by the caller

    Returns:
        A copy of the options with a normalised directory

    Raises:
        ConfigError: If the directory is missing or does not exist
    """
    directory = options.directory
    if not directory:
        raise ConfigError('Required REPL option "directory" not specified')
    if not os.path.exists(directory):
        raise ConfigError(f'Invalid REPL directory specified "{directory}"')
    if not directory.endswith("/"):
        directory += "/"
    return replace(options, directory=directory)


def load_options(path: str | Path, **overrides) -> ReplOptions:
    """
    Load REPL options from a YAML file.

    A relative ``directory`` is resolved against the folder holding the
    config file. Keyword overrides that are not None take precedence over
    the values read from the file.

    Args:
        path: Path to the YAML file
        **overrides: ReplOptions fields set by the caller (e.g. CLI flags)

    Returns:
        ReplOptions (not yet validated)
    """
    path = Path(path)
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except OSError as e:
        raise ConfigError(f'Cannot read REPL config "{path}": {e}') from e
    except yaml.YAMLError as e:
        raise ConfigError(f'Invalid YAML in REPL config "{path}": {e}') from e

    if not isinstance(data, dict):
        raise ConfigError(f'REPL config "{path}" must be a mapping')

    values = {}
    for key, value in data.items():
        name = _OPTION_KEYS.get(key)
        if name is None:
            logger.warning(f"Ignoring unknown REPL option '{key}' in {path}")
            continue
        values[name] = value

    for name in ("dependencies", "externals"):
        if name in values:
            items = values[name] or ()
            if isinstance(items, str):
                items = (items,)
            elif not isinstance(items, (list, tuple)):
                raise ConfigError(f'REPL option "{name}" in "{path}" must be a list')
            values[name] = tuple(str(item) for item in items)

    directory = values.get("directory")
    if directory and not os.path.isabs(directory):
        values["directory"] = str(path.parent / directory)

    values.update({k: v for k, v in overrides.items() if v is not None})
    logger.debug(f"Loaded REPL options from {path}")
    return ReplOptions(**values)


def get_pandoc_config():
    """
    Configuration for pypandoc/Pandoc markdown rendering.

    REPL links are rewritten on Pandoc's JSON AST, so the same input format
    is used for both the markdown → JSON and the JSON → HTML conversions.
    """
    return {
        "format": "markdown+autolink_bare_uris+strikeout+task_lists+pipe_tables+fenced_code_blocks+fenced_code_attributes+raw_html",
        "extra_args": [
            "--wrap=none",
        ],
    }
