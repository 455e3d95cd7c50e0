"""Tests for specmodel.models -- wire names, presence, immutability, recursion."""

from __future__ import annotations

from typing import Any

import pytest
from pydantic import ValidationError

from specmodel.models import (
    XML,
    Components,
    Discriminator,
    Document,
    Example,
    Header,
    HTTPMethod,
    MediaType,
    OAuthFlows,
    Operation,
    Parameter,
    PathItem,
    RequestBody,
    Response,
    Responses,
    Schema,
    SecurityScheme,
)


class TestPetstoreDocument:
    """Field mapping across a realistic document."""

    @pytest.fixture
    def doc(self, petstore_raw: dict[str, Any]) -> Document:
        return Document.model_validate(petstore_raw)

    def test_operation_fields(self, doc: Document) -> None:
        op = doc.paths["/pets"].get
        assert isinstance(op, Operation)
        assert op.tags == ["pets"]
        assert op.summary == "List all pets"
        assert op.operation_id == "listPets"
        assert op.request_body is None

    def test_parameter_fields(self, doc: Document) -> None:
        param = doc.paths["/pets"].get.parameters[0]
        assert param.name == "limit"
        assert param.location == "query"
        assert param.required is False
        assert param.example == 20
        assert param.schema_.type == "integer"
        assert param.schema_.maximum == 100
        assert param.schema_.minimum == 1

    def test_request_body(self, doc: Document) -> None:
        body = doc.paths["/pets"].post.request_body
        assert isinstance(body, RequestBody)
        assert body.required is True
        media = body.content["application/json"]
        assert isinstance(media, MediaType)
        example = media.examples["doggie"]
        assert isinstance(example, Example)
        assert example.value == {"id": 1, "name": "Rex", "tag": "dog"}

    def test_response_headers(self, doc: Document) -> None:
        ok = doc.paths["/pets"].get.responses.responses["200"]
        header = ok.headers["x-next"]
        assert isinstance(header, Header)
        assert header.schema_.type == "string"

    def test_schema_fields(self, doc: Document) -> None:
        pet = doc.components.schemas["Pet"]
        assert pet.type == "object"
        assert pet.required == ["id", "name"]
        assert pet.properties["id"].read_only is True
        assert pet.properties["name"].max_length == 64
        assert pet.properties["name"].min_length == 1
        assert pet.properties["tag"].nullable is True
        assert pet.xml == XML(name="pet", wrapped=False)

    def test_composition_and_discriminator(self, doc: Document) -> None:
        animal = doc.components.schemas["Animal"]
        assert len(animal.one_of) == 2
        assert animal.one_of[1].properties["wild"].type == "boolean"
        assert animal.discriminator == Discriminator(
            property_name="kind", mapping={"pet": "#/components/schemas/Pet"}
        )

    def test_additional_properties_schema(self, doc: Document) -> None:
        labels = doc.components.schemas["Labels"]
        assert isinstance(labels.additional_properties, Schema)
        assert labels.additional_properties.type == "string"

    def test_security_schemes(self, doc: Document) -> None:
        schemes = doc.components.security_schemes
        assert schemes["api_key"].type == "apiKey"
        assert schemes["api_key"].location == "header"
        assert schemes["bearer"].bearer_format == "JWT"
        assert schemes["oidc"].open_id_connect_url.endswith("openid-configuration")

    def test_oauth_flows(self, doc: Document) -> None:
        flows = doc.components.security_schemes["oauth"].flows
        assert isinstance(flows, OAuthFlows)
        assert flows.implicit is None
        assert flows.password is None
        code = flows.authorization_code
        assert code.authorization_url == "https://auth.example.com/authorize"
        assert code.scopes == {"read:pets": "Read pets", "write:pets": "Modify pets"}
        assert flows.client_credentials.scopes == {}

    def test_iter_operations(self, doc: Document) -> None:
        found = [(path, method) for path, method, _ in doc.iter_operations()]
        assert found == [
            ("/pets", HTTPMethod.GET),
            ("/pets", HTTPMethod.POST),
            ("/pets/{petId}", HTTPMethod.GET),
            ("/pets/{petId}", HTTPMethod.DELETE),
        ]


class TestPresence:
    """Absent versus explicit values."""

    def test_every_model_accepts_empty_mapping(self) -> None:
        for model in (
            Document, Schema, Parameter, PathItem, Operation, Components,
            SecurityScheme, OAuthFlows, Response, Responses, Header, XML,
        ):
            instance = model.model_validate({})
            assert instance is not None

    def test_absent_not_in_fields_set(self) -> None:
        param = Parameter.model_validate({"name": "q"})
        assert param.model_fields_set == {"name"}
        assert param.location is None

    def test_explicit_null_in_fields_set(self) -> None:
        schema = Schema.model_validate({"example": None})
        assert "example" in schema.model_fields_set
        assert schema.example is None

    def test_empty_collections_not_defaulted(self) -> None:
        op = Operation.model_validate({"tags": []})
        assert op.tags == []
        assert op.parameters is None

    def test_responses_mapping_present_but_empty(self) -> None:
        responses = Responses.model_validate({"default": {"description": "d"}})
        assert responses.responses == {}
        assert responses.default.description == "d"


class TestWireNames:
    """Aliases and reserved-word renames."""

    def test_parameter_in_alias(self) -> None:
        param = Parameter.model_validate({"in": "header"})
        assert param.location == "header"
        assert param.model_dump(by_alias=True, exclude_unset=True) == {"in": "header"}

    def test_python_names_accepted_on_construction(self) -> None:
        param = Parameter(location="cookie", schema_=Schema(type="string"))
        assert param.model_dump(by_alias=True, exclude_unset=True) == {
            "in": "cookie",
            "schema": {"type": "string"},
        }

    def test_schema_not_alias(self) -> None:
        schema = Schema.model_validate({"not": {"type": "string"}})
        assert schema.not_.type == "string"

    def test_camel_case_fields(self) -> None:
        schema = Schema.model_validate({
            "multipleOf": 2,
            "exclusiveMaximum": True,
            "exclusiveMinimum": False,
            "maxItems": 3,
            "minItems": 1,
            "uniqueItems": True,
            "maxProperties": 5,
            "minProperties": 0,
            "writeOnly": True,
            "allOf": [{}],
            "anyOf": [{}, {}],
        })
        assert schema.multiple_of == 2.0
        assert schema.exclusive_maximum is True
        assert schema.exclusive_minimum is False
        assert schema.max_items == 3
        assert schema.min_items == 1
        assert schema.unique_items is True
        assert schema.max_properties == 5
        assert schema.min_properties == 0
        assert schema.write_only is True
        assert len(schema.all_of) == 1
        assert len(schema.any_of) == 2

    def test_numeric_exclusive_bounds(self) -> None:
        schema = Schema.model_validate({"exclusiveMaximum": 10, "exclusiveMinimum": 0.5})
        assert schema.exclusive_maximum == 10
        assert schema.exclusive_minimum == 0.5

    def test_boolean_additional_properties(self) -> None:
        assert Schema.model_validate({"additionalProperties": False}).additional_properties is False
        assert Schema.model_validate({"additionalProperties": True}).additional_properties is True

    def test_components_camel_case(self) -> None:
        comps = Components.model_validate({
            "requestBodies": {"B": {"required": True}},
            "securitySchemes": {"S": {"type": "http", "scheme": "basic"}},
        })
        assert comps.request_bodies["B"].required is True
        assert comps.security_schemes["S"].scheme == "basic"

    def test_example_external_value(self) -> None:
        example = Example.model_validate({"externalValue": "https://example.com/ex.json"})
        assert example.external_value == "https://example.com/ex.json"

    def test_numbers_coerced_to_strings(self) -> None:
        doc = Document.model_validate({"openapi": 3.0, "info": {"version": 2}})
        assert doc.openapi == "3.0"
        assert doc.info.version == "2"


class TestResponsesModel:
    """Responses decode/encode through the flattened mapping."""

    def test_default_never_in_mapping(self) -> None:
        responses = Responses.model_validate({"200": {}, "default": {}, "500": {}})
        assert set(responses.responses) == {"200", "500"}
        assert responses.default == Response()

    def test_build(self) -> None:
        responses = Responses.build({"200": {"description": "ok"}})
        assert responses.responses["200"].description == "ok"
        assert "default" not in responses.model_fields_set

    def test_build_rejects_default_entry(self) -> None:
        with pytest.raises(ValueError):
            Responses.build({"default": {}})

    def test_keyword_construction(self) -> None:
        ok = Response(description="ok")
        err = Response(description="err")
        responses = Responses(responses={"200": ok}, default=err)
        assert responses.responses == {"200": ok}
        assert responses.default == err
        assert responses.model_dump(mode="json", by_alias=True, exclude_unset=True) == {
            "200": {"description": "ok"},
            "default": {"description": "err"},
        }

    def test_keyword_construction_without_default(self) -> None:
        responses = Responses(responses={"201": Response()})
        assert list(responses.responses) == ["201"]
        assert "default" not in responses.model_fields_set

    def test_invalid_entry_reports_status_code(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            Responses.model_validate({"200": "not an object"})
        assert exc_info.value.errors()[0]["loc"][:2] == ("responses", "200")


class TestImmutability:
    """Models are frozen once built."""

    def test_assignment_rejected(self) -> None:
        doc = Document.model_validate({"openapi": "3.0.0"})
        with pytest.raises(ValidationError):
            doc.openapi = "3.1.0"  # type: ignore[misc]

    def test_nested_assignment_rejected(self) -> None:
        schema = Schema.model_validate({"items": {"type": "string"}})
        with pytest.raises(ValidationError):
            schema.items.type = "integer"  # type: ignore[misc]


class TestRecursion:
    """Schema nests Schema as an owned tree."""

    def test_nested_nodes_are_distinct_instances(self) -> None:
        schema = Schema.model_validate({
            "properties": {"a": {"type": "string"}, "b": {"type": "string"}},
        })
        assert schema.properties["a"] == schema.properties["b"]
        assert schema.properties["a"] is not schema.properties["b"]

    def test_mixed_recursion(self) -> None:
        schema = Schema.model_validate({
            "not": {"items": {"allOf": [{"additionalProperties": {"oneOf": [{"type": "x"}]}}]}},
        })
        assert schema.not_.items.all_of[0].additional_properties.one_of[0].type == "x"

    def test_path_item_operations_order(self) -> None:
        item = PathItem.model_validate({
            "trace": {}, "get": {}, "head": {}, "post": {}, "summary": "ignored",
        })
        assert [m for m, _ in item.operations()] == [
            HTTPMethod.GET, HTTPMethod.POST, HTTPMethod.HEAD, HTTPMethod.TRACE,
        ]
