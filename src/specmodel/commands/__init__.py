"""Built-in CLI sub-commands for specmodel.

* :mod:`~specmodel.commands.inspect` -- ``specmodel inspect`` group
  (``info``, ``paths``, ``schemas``, ``auth``).
* :mod:`~specmodel.commands.convert` -- ``specmodel convert``, re-encode a
  spec as JSON or YAML.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import typer

from specmodel.exceptions import SpecmodelError
from specmodel.output import error

if TYPE_CHECKING:
    from specmodel.models import Document


def load_document(ctx: typer.Context, path: str) -> Document:
    """Parse *path* with the CLI's resolved config, exiting cleanly on failure.

    Raises:
        typer.Exit: With the error's exit code when the spec cannot be loaded.
    """
    from specmodel.parser import parse_openapi_file

    config = (ctx.obj or {}).get("config")
    try:
        return parse_openapi_file(path, config=config)
    except SpecmodelError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None
