# code_repls/markdown/__init__.py

from .config import ReplOptions, load_options, validate_options
from .errors import ConfigError, ReplError, ValidationError
from .nodes import Node, map_tree
from .protocols import Playground, classify
from .transform import code_repls, transform_link

__all__ = [
    "ConfigError",
    "Node",
    "Playground",
    "ReplError",
    "ReplOptions",
    "ValidationError",
    "classify",
    "code_repls",
    "load_options",
    "map_tree",
    "transform_link",
    "validate_options",
]
