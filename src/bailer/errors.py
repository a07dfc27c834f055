# -*- coding: ascii -*-
"""Exception types raised by bailer."""


class BailerError(Exception):
    """Base class for all bailer errors."""


class InvalidArityError(BailerError, ValueError):
    """Raised when a ligand list does not hold exactly six labels."""

    def __init__(self, count: int, message: str = None):
        self.count = count
        if message is None:
            message = f"6 comma separated ligands must be provided (got {count})"
        super().__init__(message)


class ConfigError(BailerError):
    """Raised when a configuration file cannot be loaded or is malformed."""
