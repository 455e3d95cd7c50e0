"""Convert command -- decode a spec and re-encode it as JSON or YAML.

The output is produced from the typed model, so unknown keys are dropped
and the Responses mapping is re-flattened; only fields present in the
source are written.
"""

from __future__ import annotations

from typing import Optional

import typer

from specmodel.commands import load_document
from specmodel.exceptions import UnsupportedFormat
from specmodel.output import error, get_output, success
from specmodel.parser import SpecFormat, detect_format, dump_spec


def _target_format(
    ctx: typer.Context, source: str, requested: Optional[SpecFormat]
) -> SpecFormat:
    """Pick the output encoding.

    Precedence: explicit ``--to``, then the ``-o`` file extension, then the
    opposite of the source encoding.
    """
    if requested is not None:
        return requested
    output_file = (ctx.obj or {}).get("output_file")
    if output_file:
        return detect_format(output_file)
    return SpecFormat.YAML if detect_format(source) == SpecFormat.JSON else SpecFormat.JSON


def convert_command(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Path to a .json, .yaml or .yml spec file."),
    to: Optional[SpecFormat] = typer.Option(
        None,
        "--to",
        "-t",
        case_sensitive=False,
        help="Target encoding. Defaults to the -o file's extension, else the other format.",
    ),
) -> None:
    """Re-encode a spec file as JSON or YAML.

    Example::

        specmodel convert openapi.json --to yaml
        specmodel -o openapi.yaml convert openapi.json
    """
    doc = load_document(ctx, path)
    try:
        fmt = _target_format(ctx, path, to)
    except UnsupportedFormat as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    get_output().print_document(dump_spec(doc, fmt), fmt.value)
    output_file = (ctx.obj or {}).get("output_file")
    if output_file:
        success(f"Wrote {fmt.value.upper()} spec to {output_file}")
