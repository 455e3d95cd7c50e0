"""Typed Pydantic models for an OpenAPI 3.x document.

This is the single source of truth for the shape of a decoded spec. Every
model is immutable (``frozen=True``) and every field is optional, so a
partial or minimal document (even ``{}``) decodes without error.

Wire names
    Source documents use camelCase keys. Field names here are snake_case and
    the camelCase wire name is produced by Pydantic's ``to_camel`` alias
    generator. Fields whose natural name is a Python keyword or would shadow
    a :class:`~pydantic.BaseModel` attribute declare an explicit alias:

    ========================  ==================
    Python field              Wire name
    ========================  ==================
    ``location``              ``in``
    ``not_``                  ``not``
    ``schema_``               ``schema``
    ``type``                  ``type``
    ========================  ==================

    Models are built with ``populate_by_name=True`` so Python code can also
    construct them using the field names, e.g. ``Parameter(location="query")``.

Presence
    A field missing from the source is *absent*: it is not listed in
    ``model_fields_set`` and is omitted when dumping with
    ``exclude_unset=True``. An explicit ``null`` is *present* with the value
    ``None`` and survives a dump.

Unknown keys
    Keys that are not part of the model (including ``x-`` extensions and
    ``$ref``) are dropped on decode.

The model tree is built once by :meth:`Document.model_validate` and never
mutated afterwards. ``Schema`` nests ``Schema`` through ``not``, ``items``,
``additionalProperties``, ``properties`` and the ``*Of`` lists; each nested
node is its own instance owned by its parent.
"""

from __future__ import annotations

import enum
from collections.abc import Iterator, Mapping
from typing import Any, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    NonNegativeInt,
    SerializerFunctionWrapHandler,
    model_serializer,
    model_validator,
)
from pydantic.alias_generators import to_camel

from specmodel.responses import DEFAULT_KEY, MISSING, join_responses, split_responses

_MODEL_KEYS = frozenset({"responses", DEFAULT_KEY})


class OpenAPIModel(BaseModel):
    """Common configuration shared by every document model."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )


class HTTPMethod(str, enum.Enum):
    """HTTP methods recognised by OpenAPI 3.x path-item objects.

    Declaration order is the order :meth:`PathItem.operations` yields them.
    """

    GET = "get"
    POST = "post"
    PUT = "put"
    DELETE = "delete"
    PATCH = "patch"
    OPTIONS = "options"
    HEAD = "head"
    TRACE = "trace"


# --- Leaf objects ---


class Info(OpenAPIModel):
    """API metadata from the *Info Object*."""

    title: Optional[str] = None
    description: Optional[str] = None
    version: Optional[str] = None


class Server(OpenAPIModel):
    """A base URL the API is reachable at."""

    url: Optional[str] = None
    description: Optional[str] = None


class Example(OpenAPIModel):
    """A sample value. ``value`` is stored exactly as decoded, untyped."""

    summary: Optional[str] = None
    description: Optional[str] = None
    value: Any = None
    external_value: Optional[str] = None


class Discriminator(OpenAPIModel):
    """Polymorphism hint inside a :class:`Schema`."""

    property_name: Optional[str] = None
    mapping: Optional[dict[str, str]] = None


class XML(OpenAPIModel):
    name: Optional[str] = None
    namespace: Optional[str] = None
    prefix: Optional[str] = None
    attribute: Optional[bool] = None
    wrapped: Optional[bool] = None


# --- Schema ---


class Schema(OpenAPIModel):
    """A JSON-Schema-style type description (OpenAPI *Schema Object*).

    Recursive: ``not_``, ``items`` and ``additional_properties`` hold one
    nested Schema each, ``all_of``/``one_of``/``any_of`` hold ordered lists
    and ``properties`` maps property names to Schemas.

    ``exclusive_maximum``/``exclusive_minimum`` accept both the OpenAPI 3.0
    boolean form and the 3.1 numeric form. ``additional_properties`` accepts
    a Schema or a plain boolean.

    Nesting depth is bounded by pydantic's validator recursion guard
    (roughly 250 nested Schemas); deeper documents fail to decode with a
    "nested too deeply" message.
    """

    title: Optional[str] = None
    multiple_of: Optional[float] = None
    maximum: Optional[float] = None
    exclusive_maximum: Optional[Union[bool, float]] = None
    minimum: Optional[float] = None
    exclusive_minimum: Optional[Union[bool, float]] = None
    max_length: Optional[NonNegativeInt] = None
    min_length: Optional[NonNegativeInt] = None
    pattern: Optional[str] = None
    max_items: Optional[NonNegativeInt] = None
    min_items: Optional[NonNegativeInt] = None
    unique_items: Optional[bool] = None
    max_properties: Optional[NonNegativeInt] = None
    min_properties: Optional[NonNegativeInt] = None
    required: Optional[list[str]] = None
    type: Optional[str] = Field(default=None, alias="type")
    not_: Optional[Schema] = Field(default=None, alias="not")
    all_of: Optional[list[Schema]] = None
    one_of: Optional[list[Schema]] = None
    any_of: Optional[list[Schema]] = None
    items: Optional[Schema] = None
    properties: Optional[dict[str, Schema]] = None
    additional_properties: Optional[Union[bool, Schema]] = None
    description: Optional[str] = None
    format: Optional[str] = None
    default: Any = None
    nullable: Optional[bool] = None
    discriminator: Optional[Discriminator] = None
    read_only: Optional[bool] = None
    write_only: Optional[bool] = None
    xml: Optional[XML] = None
    example: Any = None
    deprecated: Optional[bool] = None


# --- Request / response payloads ---


class MediaType(OpenAPIModel):
    """One content type's payload shape."""

    schema_: Optional[Schema] = Field(default=None, alias="schema")
    example: Any = None
    examples: Optional[dict[str, Example]] = None


class Header(OpenAPIModel):
    description: Optional[str] = None
    schema_: Optional[Schema] = Field(default=None, alias="schema")
    example: Any = None


class Parameter(OpenAPIModel):
    """A request input. ``location`` is the wire field ``in``."""

    name: Optional[str] = None
    location: Optional[str] = Field(default=None, alias="in")
    required: Optional[bool] = None
    schema_: Optional[Schema] = Field(default=None, alias="schema")
    description: Optional[str] = None
    example: Any = None
    examples: Optional[dict[str, Example]] = None


class RequestBody(OpenAPIModel):
    content: Optional[dict[str, MediaType]] = None
    description: Optional[str] = None
    required: Optional[bool] = None


class Response(OpenAPIModel):
    description: Optional[str] = None
    content: Optional[dict[str, MediaType]] = None
    headers: Optional[dict[str, Header]] = None


class Responses(OpenAPIModel):
    """All declared responses of an operation.

    On the wire this is one flat mapping. Every key except ``default`` is a
    status code and lands in :attr:`responses`; ``default`` lands in
    :attr:`default`. Input that is already in model shape (only the keys
    ``responses`` and ``default``, with ``responses`` a mapping) is taken
    as-is, so ``Responses(responses={...}, default=...)`` works like any
    other model. Everything else goes through
    :func:`~specmodel.responses.split_responses`. :meth:`build` does the
    same from a status-code mapping and a default response.

    :attr:`responses` is always present after decode (empty when the source
    lists only ``default`` or nothing at all).
    """

    responses: Optional[dict[str, Response]] = None
    default: Optional[Response] = None

    @model_validator(mode="before")
    @classmethod
    def _split_flattened(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        # Already in model shape, e.g. Responses(responses={...}, default=...).
        if set(data) <= _MODEL_KEYS and isinstance(data.get("responses"), Mapping):
            return data
        return split_responses(data)

    @model_serializer(mode="wrap")
    def _join_flattened(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        return join_responses(data.get("responses"), data.get("default", MISSING))

    @classmethod
    def build(
        cls,
        responses: Optional[Mapping[str, Union[Response, dict[str, Any]]]] = None,
        default: Union[Response, dict[str, Any], None] = MISSING,
    ) -> Responses:
        """Construct from a status-code mapping and an optional default response.

        Raises:
            ValueError: If *responses* contains the reserved ``default`` key.
        """
        return cls.model_validate(join_responses(responses, default))


# --- Operations and paths ---


class Operation(OpenAPIModel):
    tags: Optional[list[str]] = None
    summary: Optional[str] = None
    description: Optional[str] = None
    operation_id: Optional[str] = None
    parameters: Optional[list[Parameter]] = None
    request_body: Optional[RequestBody] = None
    responses: Optional[Responses] = None


class PathItem(OpenAPIModel):
    """Operations available on one URL path, one optional slot per verb."""

    get: Optional[Operation] = None
    post: Optional[Operation] = None
    put: Optional[Operation] = None
    delete: Optional[Operation] = None
    patch: Optional[Operation] = None
    options: Optional[Operation] = None
    head: Optional[Operation] = None
    trace: Optional[Operation] = None

    def operations(self) -> Iterator[tuple[HTTPMethod, Operation]]:
        """Yield ``(method, operation)`` for every verb that is present."""
        for method in HTTPMethod:
            operation = getattr(self, method.value)
            if operation is not None:
                yield method, operation


# --- Security ---


class OAuthFlow(OpenAPIModel):
    authorization_url: Optional[str] = None
    token_url: Optional[str] = None
    refresh_url: Optional[str] = None
    scopes: Optional[dict[str, str]] = None


class OAuthFlows(OpenAPIModel):
    """The four OAuth2 flow slots."""

    implicit: Optional[OAuthFlow] = None
    password: Optional[OAuthFlow] = None
    client_credentials: Optional[OAuthFlow] = None
    authorization_code: Optional[OAuthFlow] = None


class SecurityScheme(OpenAPIModel):
    """An authentication mechanism descriptor.

    ``type`` discriminates between ``apiKey``, ``http``, ``oauth2`` and
    ``openIdConnect``; ``location`` is the wire field ``in`` (``apiKey`` only).
    """

    type: Optional[str] = Field(default=None, alias="type")
    description: Optional[str] = None
    name: Optional[str] = None
    location: Optional[str] = Field(default=None, alias="in")
    scheme: Optional[str] = None
    bearer_format: Optional[str] = None
    flows: Optional[OAuthFlows] = None
    open_id_connect_url: Optional[str] = None


# --- Root ---


class Components(OpenAPIModel):
    """Reusable definitions, keyed by name. No reference resolution is done."""

    schemas: Optional[dict[str, Schema]] = None
    responses: Optional[dict[str, Response]] = None
    parameters: Optional[dict[str, Parameter]] = None
    examples: Optional[dict[str, Example]] = None
    request_bodies: Optional[dict[str, RequestBody]] = None
    headers: Optional[dict[str, Header]] = None
    security_schemes: Optional[dict[str, SecurityScheme]] = None


class Document(OpenAPIModel):
    """Root of a decoded OpenAPI description.

    Produced by :func:`~specmodel.parser.loader.parse_openapi_file` and
    :func:`~specmodel.parser.loader.decode_spec`. The ``openapi`` version
    string is recorded as-is and never checked.

    See Also:
        :func:`~specmodel.parser.writer.dump_spec`: Encode back to JSON/YAML.
    """

    openapi: Optional[str] = None
    info: Optional[Info] = None
    paths: Optional[dict[str, PathItem]] = None
    components: Optional[Components] = None
    servers: Optional[list[Server]] = None

    def iter_operations(self) -> Iterator[tuple[str, HTTPMethod, Operation]]:
        """Yield ``(path, method, operation)`` across all paths in source order."""
        for path, item in (self.paths or {}).items():
            for method, operation in item.operations():
                yield path, method, operation
