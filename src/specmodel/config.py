"""Loader configuration and precedence resolution.

specmodel has very little to configure: the text encoding used to read spec
files and the log level the CLI installs. Both resolve through the same
precedence chain (high to low):

1. Explicit arguments (CLI flags)
2. Environment variables (``SPECMODEL_TEXT_ENCODING``, ``SPECMODEL_LOG_LEVEL``)
3. Defaults on :class:`LoaderConfig`

Library callers that do not care can pass nothing; every loader function
falls back to ``LoaderConfig()``.
"""

from __future__ import annotations

import codecs
import logging
import os
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from specmodel.exceptions import ConfigError

ENV_TEXT_ENCODING = "SPECMODEL_TEXT_ENCODING"
ENV_LOG_LEVEL = "SPECMODEL_LOG_LEVEL"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class LoaderConfig(BaseModel):
    """Effective settings for loading specs.

    Example::

        LoaderConfig(text_encoding="utf-8-sig", log_level="DEBUG")
    """

    model_config = ConfigDict(frozen=True)

    text_encoding: str = Field(
        default="utf-8", description="Codec used to read spec files as text"
    )
    log_level: str = Field(
        default="WARNING", description="Log level installed by the CLI"
    )

    @field_validator("text_encoding")
    @classmethod
    def _known_codec(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"unknown text encoding: {value}") from exc
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"unknown log level: {value} (expected one of {', '.join(_LOG_LEVELS)})"
            )
        return level

    @property
    def log_level_number(self) -> int:
        """The ``logging`` module constant for :attr:`log_level`."""
        return logging.getLevelName(self.log_level)


def resolve_config(
    cli_encoding: Optional[str] = None,
    cli_log_level: Optional[str] = None,
) -> LoaderConfig:
    """Resolve the effective :class:`LoaderConfig`.

    Args:
        cli_encoding: Text encoding from a CLI flag (highest precedence).
        cli_log_level: Log level from a CLI flag (highest precedence).

    Returns:
        The merged configuration.

    Raises:
        ConfigError: If the resolved encoding or log level is invalid.
    """
    values: dict[str, str] = {}

    env_encoding = os.environ.get(ENV_TEXT_ENCODING)
    if env_encoding:
        values["text_encoding"] = env_encoding
    env_level = os.environ.get(ENV_LOG_LEVEL)
    if env_level:
        values["log_level"] = env_level

    if cli_encoding is not None:
        values["text_encoding"] = cli_encoding
    if cli_log_level is not None:
        values["log_level"] = cli_log_level

    try:
        return LoaderConfig(**values)
    except ValueError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc
