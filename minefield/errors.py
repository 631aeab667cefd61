from __future__ import annotations


class MinefieldError(Exception):
    """Base class for every error raised by the minefield package."""


class ConfigError(MinefieldError):
    """Board dimensions or mine count outside the supported limits."""


class ParseError(MinefieldError):
    """A command line that does not follow the command grammar."""


class OutOfRange(ParseError):
    """A well-formed position that falls outside the current board."""
