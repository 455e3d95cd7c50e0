"""Exception hierarchy for specmodel.

All exceptions inherit from :class:`SpecmodelError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`specmodel.exit_codes`.
The library raises these directly to its caller; the CLI entry point in
:func:`specmodel.app.main` catches ``SpecmodelError`` and exits with the
matching code.

Subclass hierarchy::

    SpecmodelError          (exit 1)
    +-- ConfigError         (exit 1)
    +-- ReadError           (exit 3)
    +-- DecodeError         (exit 4)
    |   +-- JsonDecodeError
    |   +-- YamlDecodeError
    +-- UnsupportedFormat   (exit 5)
"""

from __future__ import annotations

from typing import Optional

from specmodel.exit_codes import (
    EXIT_DECODE_ERROR,
    EXIT_GENERIC_FAILURE,
    EXIT_READ_ERROR,
    EXIT_UNSUPPORTED_FORMAT,
)


class SpecmodelError(Exception):
    """Base exception for all specmodel errors.

    Args:
        message: Human-readable error description.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class ConfigError(SpecmodelError):
    """Raised for invalid configuration values (e.g. an unknown log level)."""

    exit_code = EXIT_GENERIC_FAILURE


class ReadError(SpecmodelError):
    """Raised when the spec file cannot be opened or read as text.

    The underlying :class:`OSError` or :class:`UnicodeDecodeError` is
    chained as ``__cause__``.
    """

    exit_code = EXIT_READ_ERROR

    def __init__(self, message: str, path: str = ""):
        super().__init__(message)
        self.path = path


class DecodeError(SpecmodelError):
    """Raised when spec text cannot be decoded into a :class:`~specmodel.models.Document`.

    Covers both syntax errors in the encoding and values whose shape does
    not fit the document model. ``line`` and ``column`` are 1-based and are
    only set when the underlying decoder reports a position.
    """

    exit_code = EXIT_DECODE_ERROR
    encoding: str = ""

    def __init__(
        self,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ):
        super().__init__(message)
        self.line = line
        self.column = column


class JsonDecodeError(DecodeError):
    """Raised when JSON text is malformed or does not match the document model."""

    encoding = "json"


class YamlDecodeError(DecodeError):
    """Raised when YAML text is malformed or does not match the document model."""

    encoding = "yaml"


class UnsupportedFormat(SpecmodelError):
    """Raised when a file extension is neither ``.json`` nor ``.yaml``/``.yml``.

    Named after the condition rather than with an ``Error`` suffix so it
    reads naturally at the raise site: ``raise UnsupportedFormat(path)``.
    """

    exit_code = EXIT_UNSUPPORTED_FORMAT

    def __init__(self, path: str):
        super().__init__(
            f"Unsupported file format: {path!r}. "
            "Only .json and .yaml/.yml files are supported."
        )
        self.path = path
