"""Encode a :class:`~specmodel.models.Document` back to JSON or YAML text.

Encoding is the inverse of :func:`~specmodel.parser.loader.decode_spec`:
fields are written under their wire names, absent fields are omitted,
explicit ``null`` values are kept, and the Responses mapping is flattened
again. Source formatting (key quoting, comments, indentation) is not
reproduced.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Union

import yaml

from specmodel.models import Document
from specmodel.parser.formats import SpecFormat, detect_format

logger = logging.getLogger(__name__)


def to_wire(document: Document) -> dict[str, Any]:
    """Return *document* as a plain dict keyed by wire names."""
    return document.model_dump(mode="json", by_alias=True, exclude_unset=True)


def dump_spec(document: Document, fmt: SpecFormat) -> str:
    """Serialise *document* as JSON or YAML text.

    Args:
        document: The document to encode.
        fmt: Target encoding.

    Returns:
        The encoded text, ending in a newline.
    """
    data = to_wire(document)
    if fmt == SpecFormat.JSON:
        return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)


def write_openapi_file(document: Document, path: Union[str, os.PathLike[str]]) -> None:
    """Write *document* to *path*, choosing the encoding from its extension.

    Raises:
        UnsupportedFormat: If the extension is not recognised.
        OSError: If the file cannot be written.
    """
    fmt = detect_format(path)
    text = dump_spec(document, fmt)
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(text)
    logger.debug("Wrote %s spec to %s", fmt.value, os.fspath(path))
