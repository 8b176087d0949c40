"""
Exception types raised by the jsonany decoder, encoders, and settings loaders.

Provides typed exceptions for the failure modes of the library:
- ParseError for input that is not valid RFC 8259 JSON.
- InputTooLargeError when a configured input size limit is exceeded.
- EncodeError when a decoded node cannot be re-encoded as JSON.
- ConfigError for invalid or unreadable settings.

Notes:
    - Out-of-range Array access raises the builtin IndexError.
    - This module has no side effects.

Examples:
    Catch a parse failure.

    >>> from jsonany import decode
    >>> from jsonany.errors import ParseError
    >>> try:
    ...     decode(b"not json")
    ... except ParseError as e:
    ...     e.pos
    0
"""

from __future__ import annotations

__all__ = [
    "JsonAnyError",
    "ParseError",
    "InputTooLargeError",
    "EncodeError",
    "ConfigError",
]


class JsonAnyError(Exception):
    """Base class for all jsonany errors."""


class ParseError(JsonAnyError, ValueError):
    """
    Raised when input bytes are not syntactically valid JSON.

    Attributes:
        msg (str): Unformatted message from the parser.
        pos (int | None): Character offset of the failure, when known.
        lineno (int | None): 1-based line of the failure, when known.
        colno (int | None): 1-based column of the failure, when known.
    """

    def __init__(
        self,
        msg: str,
        pos: int | None = None,
        lineno: int | None = None,
        colno: int | None = None,
    ) -> None:
        self.msg = msg
        self.pos = pos
        self.lineno = lineno
        self.colno = colno
        if lineno is not None and colno is not None:
            super().__init__(f"{msg}: line {lineno} column {colno} (char {pos})")
        else:
            super().__init__(msg)


class InputTooLargeError(ParseError):
    """Raised when input exceeds DecodeSettings.max_input_bytes."""


class EncodeError(JsonAnyError, ValueError):
    """
    Raised when a node cannot be re-encoded as standards-conformant JSON.

    Examples:
        - NumberFloat constructed with inf or nan
        - String holding a lone UTF-16 surrogate
    """


class ConfigError(JsonAnyError):
    """Raised when DecodeSettings cannot be built from the provided configuration."""
