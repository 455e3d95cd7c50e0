"""specmodel -- Parse OpenAPI 3.x specs into typed, immutable Python models.

Loads an OpenAPI description from a ``.json``, ``.yaml`` or ``.yml`` file and
returns a :class:`~specmodel.models.Document` tree of Pydantic models, so
code generators, validators and documentation tools never touch the raw
key-value data.

Typical usage::

    from specmodel import parse_openapi_file

    doc = parse_openapi_file("openapi.yaml")
    for path, method, op in doc.iter_operations():
        print(method.value.upper(), path, op.operation_id)

Modules:
    models: Pydantic document models with wire-name aliases.
    responses: Flatten/unflatten helpers for the Responses Object.
    parser: Format classifier, loader and writer.
    config: Loader settings and precedence resolution.
    exceptions: Exception hierarchy with exit-code mapping.
    exit_codes: Numeric exit codes following clig.dev conventions.
    output: stdout/stderr formatting for the CLI.
    app: Typer CLI entry point.
"""

__version__ = "0.1.0"

from specmodel.exceptions import (  # noqa: E402
    DecodeError,
    JsonDecodeError,
    ReadError,
    SpecmodelError,
    UnsupportedFormat,
    YamlDecodeError,
)
from specmodel.models import Document  # noqa: E402
from specmodel.parser import SpecFormat, decode_spec, detect_format, parse_openapi_file  # noqa: E402

__all__ = [
    "__version__",
    "Document",
    "SpecFormat",
    "detect_format",
    "decode_spec",
    "parse_openapi_file",
    "SpecmodelError",
    "ReadError",
    "DecodeError",
    "JsonDecodeError",
    "YamlDecodeError",
    "UnsupportedFormat",
]
