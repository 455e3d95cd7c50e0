"""Flatten and unflatten the OpenAPI *Responses Object*.

On the wire a Responses Object is a single mapping whose keys are HTTP
status codes (``"200"``, ``"4XX"``, ...) plus one reserved key,
``default``. The typed model keeps these apart: status codes live in a
``responses`` mapping and ``default`` in a dedicated field.

:func:`split_responses` turns the wire mapping into the model's shape and
:func:`join_responses` turns it back. The two are exact inverses, and the
status-code mapping produced by :func:`split_responses` never contains the
``default`` key.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

DEFAULT_KEY = "default"


class _Missing:
    """Sentinel type marking an absent ``default`` entry."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()
"""Marker for "no ``default`` key", distinct from an explicit ``null``."""


def split_responses(raw: Mapping[Any, Any]) -> dict[str, Any]:
    """Partition a wire Responses mapping into ``responses`` and ``default``.

    Every key other than the literal string ``default`` is treated as a
    status code. Non-string keys (YAML parses an unquoted ``200:`` as an
    integer) are converted with :func:`str`.

    Args:
        raw: The Responses Object exactly as decoded from JSON or YAML.

    Returns:
        A dict with a ``responses`` entry holding the status-code mapping
        (possibly empty) and, only when the source had one, a ``default``
        entry.

    Raises:
        ValueError: If two keys stringify to the same status code (YAML
            ``200:`` next to ``"200":``).

    Example::

        >>> split_responses({"200": {"description": "ok"}, "default": {}})
        {'responses': {'200': {'description': 'ok'}}, 'default': {}}
    """
    entries: dict[str, Any] = {}
    shaped: dict[str, Any] = {"responses": entries}
    for key, value in raw.items():
        if key == DEFAULT_KEY:
            shaped[DEFAULT_KEY] = value
        else:
            code = str(key)
            if code in entries:
                raise ValueError(f"duplicate status code {code!r}")
            entries[code] = value
    return shaped


def join_responses(
    entries: Optional[Mapping[str, Any]],
    default: Any = MISSING,
) -> dict[str, Any]:
    """Merge a status-code mapping and a ``default`` value into one wire mapping.

    Args:
        entries: Status code to response. ``None`` is treated as empty.
        default: The dedicated ``default`` response. Leave as
            :data:`MISSING` to omit the key entirely.

    Returns:
        The flattened mapping with status codes first, then ``default``.

    Raises:
        ValueError: If *entries* already contains a ``default`` key.
    """
    merged: dict[str, Any] = dict(entries or {})
    if DEFAULT_KEY in merged:
        raise ValueError(
            "status-code mapping must not contain the reserved 'default' key"
        )
    if default is not MISSING:
        merged[DEFAULT_KEY] = default
    return merged
