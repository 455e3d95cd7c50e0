"""Load OpenAPI specifications from local files into typed models.

This module handles the I/O and decoding half of specmodel:

* :func:`parse_openapi_file` -- classify the path, read the file through a
  scoped handle, decode it, and return a :class:`~specmodel.models.Document`.
* :func:`decode_spec` -- decode text that is already in memory.

JSON is decoded with :mod:`json` and YAML with ``yaml.safe_load``; the
resulting tree is then validated into the model. Failures surface as
:class:`~specmodel.exceptions.ReadError`,
:class:`~specmodel.exceptions.JsonDecodeError` or
:class:`~specmodel.exceptions.YamlDecodeError` with the original exception
chained. Nothing is cached: every call reads and decodes afresh.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Optional, Union

import yaml
from pydantic import ValidationError

from specmodel.config import LoaderConfig
from specmodel.exceptions import DecodeError, JsonDecodeError, ReadError, YamlDecodeError
from specmodel.models import Document
from specmodel.parser.formats import SpecFormat, detect_format

logger = logging.getLogger(__name__)


def parse_openapi_file(
    path: Union[str, os.PathLike[str]],
    config: Optional[LoaderConfig] = None,
) -> Document:
    """Parse the JSON or YAML OpenAPI file at *path*.

    The format is chosen from the file extension before any read is
    attempted, so an unsupported path never touches the filesystem.

    Args:
        path: Location of a ``.json``, ``.yaml`` or ``.yml`` file.
        config: Loader settings; defaults to ``LoaderConfig()``.

    Returns:
        The decoded document.

    Raises:
        UnsupportedFormat: If the extension is not recognised.
        ReadError: If the file cannot be opened or read as text.
        JsonDecodeError: If a JSON file is malformed or mis-shaped.
        YamlDecodeError: If a YAML file is malformed or mis-shaped.
    """
    cfg = config or LoaderConfig()
    fmt = detect_format(path)
    display = os.fspath(path)
    logger.debug("Reading %s spec from %s", fmt.value, display)

    try:
        with open(path, encoding=cfg.text_encoding) as fh:
            content = fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise ReadError(f"Failed to read spec file {display}: {exc}", path=display) from exc

    logger.debug("Read %d characters from %s", len(content), display)
    return decode_spec(content, fmt)


def decode_spec(content: str, fmt: SpecFormat) -> Document:
    """Decode spec text of the given format into a :class:`Document`.

    Args:
        content: The full text of the spec.
        fmt: Encoding of *content*.

    Returns:
        The decoded document.

    Raises:
        JsonDecodeError: For JSON input that is malformed or mis-shaped.
        YamlDecodeError: For YAML input that is malformed or mis-shaped.
    """
    if fmt == SpecFormat.JSON:
        raw = _load_json(content)
        error_cls: type[DecodeError] = JsonDecodeError
    else:
        raw = _load_yaml(content)
        error_cls = YamlDecodeError

    if not isinstance(raw, dict):
        got = type(raw).__name__ if raw is not None else "empty document"
        raise error_cls(f"Spec must be a {fmt.value.upper()} object (got {got})")

    try:
        document = Document.model_validate(raw)
    except ValidationError as exc:
        raise error_cls(_describe_validation_error(exc)) from exc

    logger.debug(
        "Decoded spec: openapi=%s, %d path(s)",
        document.openapi,
        len(document.paths or {}),
    )
    return document


def _load_json(content: str) -> Any:
    """Parse JSON text into a generic tree."""
    try:
        return json.loads(content)
    except json.JSONDecodeError as exc:
        raise JsonDecodeError(
            f"Invalid JSON: {exc}", line=exc.lineno, column=exc.colno
        ) from exc


def _load_yaml(content: str) -> Any:
    """Parse a single YAML document into a generic tree."""
    try:
        return yaml.safe_load(content)
    except yaml.YAMLError as exc:
        line = column = None
        mark = getattr(exc, "problem_mark", None)
        if mark is not None:
            line, column = mark.line + 1, mark.column + 1
        raise YamlDecodeError(f"Invalid YAML: {exc}", line=line, column=column) from exc


def _describe_validation_error(exc: ValidationError) -> str:
    """Summarise a Pydantic error as ``field.path: message`` lines."""
    lines = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err["loc"]) or "<root>"
        if err["type"] == "recursion_loop":
            # pydantic reports depth overflow as a cyclic reference.
            lines.append(f"  {location}: nested too deeply (validator depth limit reached)")
        else:
            lines.append(f"  {location}: {err['msg']}")
    count = exc.error_count()
    plural = "s" if count != 1 else ""
    header = f"Spec does not match the OpenAPI document model ({count} error{plural})"
    return "\n".join([header, *lines])
