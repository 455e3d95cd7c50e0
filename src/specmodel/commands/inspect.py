"""Inspect commands -- examine the contents of a spec file.

Provides the ``specmodel inspect`` sub-command group with read-only views
of a decoded :class:`~specmodel.models.Document`: general info, operations,
component schemas and security schemes.
"""

from __future__ import annotations

import typer

from specmodel.commands import load_document
from specmodel.models import Schema
from specmodel.output import format_response, get_output, info


inspect_app = typer.Typer(no_args_is_help=True)


@inspect_app.command("info")
def inspect_info(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Path to a .json, .yaml or .yml spec file."),
) -> None:
    """Show API info (title, version, servers, counts).

    Example::

        specmodel inspect info openapi.yaml
    """
    doc = load_document(ctx, path)
    api = doc.info

    data: dict = {
        "title": (api.title if api else None) or "-",
        "version": (api.version if api else None) or "-",
        "openapi_version": doc.openapi or "-",
        "description": (api.description if api else None) or "-",
        "servers": [s.url for s in doc.servers or [] if s.url],
        "paths": len(doc.paths or {}),
        "operations": sum(1 for _ in doc.iter_operations()),
    }
    if doc.components and doc.components.schemas:
        data["schemas"] = len(doc.components.schemas)

    format_response(data)


@inspect_app.command("paths")
def inspect_paths(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Path to a .json, .yaml or .yml spec file."),
) -> None:
    """List every operation with its method, path and declared response codes.

    Example::

        specmodel inspect paths openapi.json
    """
    doc = load_document(ctx, path)

    headers = ["Method", "Path", "Operation ID", "Summary", "Responses"]
    rows: list[list[str]] = []
    for url, method, op in doc.iter_operations():
        codes: list[str] = []
        if op.responses is not None:
            codes.extend(op.responses.responses or {})
            if op.responses.default is not None:
                codes.append("default")
        rows.append([
            method.value.upper(),
            url,
            op.operation_id or "-",
            op.summary or "-",
            ", ".join(codes) or "-",
        ])

    if not rows:
        info("No operations defined in this spec.")
        return

    title = doc.info.title if doc.info and doc.info.title else "API"
    get_output().print_table(headers, rows, title=f"{title} -- Paths ({len(rows)})")


def _describe_type(schema: Schema) -> str:
    if schema.type:
        if schema.type == "array" and schema.items is not None and schema.items.type:
            return f"array[{schema.items.type}]"
        return schema.type
    for label, variants in (("allOf", schema.all_of), ("oneOf", schema.one_of), ("anyOf", schema.any_of)):
        if variants:
            return f"{label}({len(variants)})"
    return "-"


@inspect_app.command("schemas")
def inspect_schemas(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Path to a .json, .yaml or .yml spec file."),
) -> None:
    """List component schemas with their type and up to five property names.

    Example::

        specmodel inspect schemas openapi.yaml
    """
    doc = load_document(ctx, path)

    schemas = doc.components.schemas if doc.components else None
    if not schemas:
        info("No schemas defined in this spec.")
        return

    headers = ["Schema", "Type", "Properties"]
    rows: list[list[str]] = []
    for name, schema in sorted(schemas.items()):
        prop_names = list(schema.properties or {})
        props = ", ".join(prop_names[:5])
        if len(prop_names) > 5:
            props += "..."
        rows.append([name, _describe_type(schema), props or "-"])

    get_output().print_table(headers, rows, title=f"Schemas ({len(rows)})")


@inspect_app.command("auth")
def inspect_auth(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Path to a .json, .yaml or .yml spec file."),
) -> None:
    """Show security schemes defined in the spec.

    Example::

        specmodel inspect auth openapi.yaml
    """
    doc = load_document(ctx, path)

    schemes = doc.components.security_schemes if doc.components else None
    if not schemes:
        info("No security schemes defined.")
        return

    headers = ["Name", "Type", "Scheme", "Location", "Description"]
    rows: list[list[str]] = []
    for name, scheme in schemes.items():
        rows.append([
            name,
            scheme.type or "-",
            scheme.scheme or "-",
            scheme.location or "-",
            (scheme.description or "-")[:60],
        ])

    get_output().print_table(headers, rows, title="Security Schemes")
