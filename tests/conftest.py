"""Shared test fixtures for specmodel.

Provides reusable fixtures for locating spec fixtures, writing ad-hoc spec
files, isolating environment configuration and running CLI commands.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable

import pytest

from specmodel.output import reset_output


FIXTURES_DIR = Path(__file__).parent / "fixtures"


# ---------------------------------------------------------------------------
# Auto-reset global state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager and CLI log handlers after every test.

    The OutputManager caches references to sys.stdout/sys.stderr at
    creation time; CliRunner swaps those streams per invocation.
    """
    yield
    reset_output()
    pkg_logger = logging.getLogger("specmodel")
    for handler in list(pkg_logger.handlers):
        if getattr(handler, "_specmodel_cli", False):
            pkg_logger.removeHandler(handler)
    pkg_logger.setLevel(logging.NOTSET)


# ---------------------------------------------------------------------------
# Spec fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def petstore_json_path() -> Path:
    """Path to the petstore JSON fixture."""
    return FIXTURES_DIR / "petstore.json"


@pytest.fixture
def petstore_yaml_path() -> Path:
    """Path to the petstore YAML fixture."""
    return FIXTURES_DIR / "petstore.yaml"


@pytest.fixture
def petstore_raw(petstore_json_path: Path) -> dict[str, Any]:
    """Raw petstore spec dict."""
    with open(petstore_json_path, encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def write_spec(tmp_path: Path) -> Callable[[str, Any], Path]:
    """Factory writing a spec into tmp_path.

    Dicts and lists are serialised as JSON; strings are written verbatim so
    tests can supply YAML or deliberately broken text.
    """

    def _write(name: str, content: Any) -> Path:
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return path

    return _write


# ---------------------------------------------------------------------------
# Config isolation fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Clear SPECMODEL_* and colour environment variables for the test."""
    for var in ["SPECMODEL_TEXT_ENCODING", "SPECMODEL_LOG_LEVEL", "NO_COLOR"]:
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


# ---------------------------------------------------------------------------
# CLI runner fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    from typer.testing import CliRunner

    return CliRunner()
