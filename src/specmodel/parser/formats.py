"""Map a spec file path to its textual encoding.

Classification looks only at the final extension of the path, compared
case-insensitively, so ``api.JSON`` and ``api.Yml`` are accepted. Paths with
no extension, and dot-files such as ``.json`` whose whole name is the
"extension", are rejected. No filesystem access happens here.
"""

from __future__ import annotations

import enum
import os
from pathlib import PurePath
from typing import Union

from specmodel.exceptions import UnsupportedFormat


class SpecFormat(str, enum.Enum):
    """Textual encodings a spec file can use."""

    JSON = "json"
    YAML = "yaml"


_EXTENSIONS: dict[str, SpecFormat] = {
    ".json": SpecFormat.JSON,
    ".yaml": SpecFormat.YAML,
    ".yml": SpecFormat.YAML,
}


def detect_format(path: Union[str, os.PathLike[str]]) -> SpecFormat:
    """Return the encoding implied by *path*'s extension.

    Args:
        path: File path as a string or path-like object.

    Returns:
        :attr:`SpecFormat.JSON` for ``.json``; :attr:`SpecFormat.YAML` for
        ``.yaml`` or ``.yml``.

    Raises:
        UnsupportedFormat: For any other extension, or none.
    """
    suffix = PurePath(path).suffix.lower()
    try:
        return _EXTENSIONS[suffix]
    except KeyError:
        raise UnsupportedFormat(os.fspath(path)) from None
