"""Typer application and CLI entry point for specmodel.

The CLI is a thin shell over the library: every command parses a spec file
with :func:`~specmodel.parser.loader.parse_openapi_file` and renders part of
the resulting :class:`~specmodel.models.Document`.

The :func:`main` function is the console-script entry point declared in
``pyproject.toml``. :class:`~specmodel.exceptions.SpecmodelError` instances
raised by a command are printed to stderr and turned into the error's
``exit_code``.

See Also:
    :mod:`specmodel.config`: Encoding and log-level resolution.
    :mod:`specmodel.output`: Output formatting initialised in :func:`main_callback`.
"""

from __future__ import annotations

import signal
import sys
from typing import Any, Optional

import typer

from specmodel import __version__
from specmodel.exit_codes import EXIT_GENERIC_FAILURE


app = typer.Typer(
    name="specmodel",
    help="Parse OpenAPI 3.x JSON/YAML specs into typed models.",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)

# ------------------------------------------------------------------ #
# Built-in commands
# ------------------------------------------------------------------ #

from specmodel.commands.convert import convert_command  # noqa: E402
from specmodel.commands.inspect import inspect_app  # noqa: E402

app.add_typer(inspect_app, name="inspect", help="Inspect spec contents.")
app.command("convert")(convert_command)


def _version_callback(value: bool) -> None:
    """Print version and exit when --version is passed."""
    if value:
        typer.echo(f"specmodel {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    json_output: bool = typer.Option(
        False, "--json", help="JSON output format."
    ),
    plain_output: bool = typer.Option(
        False, "--plain", help="Plain text output."
    ),
    no_color: bool = typer.Option(
        False, "--no-color", help="Disable color output."
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-essential output."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug logging."
    ),
    encoding: Optional[str] = typer.Option(
        None, "--encoding", help="Text encoding of spec files (default utf-8)."
    ),
    output_file: Optional[str] = typer.Option(
        None, "-o", "--output", help="Output file path."
    ),
) -> None:
    """Root callback executed before every sub-command.

    Resolves the :class:`~specmodel.config.LoaderConfig`, installs the
    global :class:`~specmodel.output.OutputManager` and routes library log
    records to stderr. The config is stored in ``ctx.obj["config"]`` for
    sub-commands.
    """
    from specmodel.config import resolve_config
    from specmodel.exceptions import ConfigError
    from specmodel.output import OutputFormat, OutputManager, set_output

    fmt = OutputFormat.AUTO
    if json_output:
        fmt = OutputFormat.JSON
    elif plain_output:
        fmt = OutputFormat.PLAIN

    output = OutputManager(
        format=fmt,
        no_color=no_color,
        quiet=quiet,
        output_file=output_file,
    )
    set_output(output)

    try:
        config = resolve_config(
            cli_encoding=encoding,
            cli_log_level="DEBUG" if verbose else None,
        )
    except ConfigError as exc:
        output.error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None
    output.configure_logging(config.log_level_number)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["output_file"] = output_file


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)

    signal.signal(signal.SIGINT, _handler)


def main() -> None:
    """CLI entry point invoked by the ``specmodel`` console script.

    :class:`~specmodel.exceptions.SpecmodelError` instances cause a clean
    exit with the error's ``exit_code``; anything else exits with
    :data:`~specmodel.exit_codes.EXIT_GENERIC_FAILURE`.

    Raises:
        SystemExit: Always raised (either by Typer or explicitly).
    """
    _setup_signal_handlers()
    try:
        app()
    except SystemExit:
        raise
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)
    except Exception as exc:
        from specmodel.exceptions import SpecmodelError
        from specmodel.output import error

        if isinstance(exc, SpecmodelError):
            error(str(exc))
            sys.exit(exc.exit_code)
        error(f"Unexpected error: {exc}")
        sys.exit(EXIT_GENERIC_FAILURE)

