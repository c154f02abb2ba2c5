# code_repls/markdown/errors.py


class ReplError(Exception):
    """Base class for errors raised while rewriting REPL links."""


class ConfigError(ReplError):
    """Raised when the REPL options are missing or invalid."""


class ValidationError(ReplError):
    """Raised when a REPL link references files that cannot be combined."""
