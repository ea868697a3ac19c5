"""
Tests writing whole documents, the components registry and the 2.0 root fields
"""

import json

import pytest
import yaml

from oasmodel import (
    Components,
    Document,
    Example,
    Header,
    Info,
    MalformedEntityError,
    MediaType,
    Operation,
    OperationType,
    Parameter,
    ParameterLocation,
    PathItem,
    Reference,
    ReferenceResolutionError,
    ReferenceType,
    RequestBody,
    Response,
    Schema,
    Server,
    SpecVersion,
    serialize_as_json,
    serialize_as_yaml,
)


@pytest.fixture
def petstore():
    limit = Parameter(
        name="limit",
        in_=ParameterLocation.query,
        schema=Schema(type="integer", format="int32"),
        reference=Reference(type=ReferenceType.parameter, id="limit"),
    )
    pet_body = RequestBody(
        content={"application/json": MediaType(schema=Schema(ref="Pet"))},
        reference=Reference(type=ReferenceType.requestBody, id="Pet"),
    )
    return Document(
        info=Info(title="Swagger Petstore", version="1.0.0"),
        servers=[Server(url="https://petstore.example.com:8443/v1"), Server(url="http://petstore.example.com/v1")],
        paths={
            "/pets": PathItem(
                operations={
                    OperationType.get: Operation(
                        operationId="listPets",
                        parameters=[limit],
                        responses={
                            "200": Response(
                                description="pets",
                                content={"application/json": MediaType(schema=Schema(type="array", items=Schema(ref="Pet")))},
                            )
                        },
                    ),
                    OperationType.post: Operation(operationId="createPet", requestBody=pet_body, responses={}),
                }
            )
        },
        components=Components(
            schemas={
                "Pet": Schema(
                    type="object",
                    required=["id"],
                    properties={"id": Schema(type="integer", format="int64"), "tag": Schema(type="string")},
                )
            },
            parameters={"limit": limit},
            requestBodies={"Pet": pet_body},
            examples={"cat": Example(value={"id": 1})},
            headers={"X-Rate": Header(schema=Schema(type="integer"))},
        ),
    )


def test_document_v3(petstore):
    data = json.loads(serialize_as_json(petstore, SpecVersion.OpenApi3_0))
    assert list(data.keys()) == ["openapi", "info", "servers", "paths", "components"]
    assert data["openapi"] == "3.0.4"
    assert data["info"] == {"title": "Swagger Petstore", "version": "1.0.0"}
    assert data["servers"][0] == {"url": "https://petstore.example.com:8443/v1"}

    get = data["paths"]["/pets"]["get"]
    assert get["parameters"] == [{"$ref": "#/components/parameters/limit"}]
    assert data["paths"]["/pets"]["post"]["requestBody"] == {"$ref": "#/components/requestBodies/Pet"}

    components = data["components"]
    assert list(components.keys()) == ["schemas", "parameters", "examples", "requestBodies", "headers"]
    assert components["parameters"]["limit"] == {
        "name": "limit",
        "in": "query",
        "schema": {"type": "integer", "format": "int32"},
    }
    assert components["requestBodies"]["Pet"] == {
        "content": {"application/json": {"schema": {"$ref": "#/components/schemas/Pet"}}}
    }


def test_document_v2(petstore):
    data = json.loads(serialize_as_json(petstore, SpecVersion.OpenApi2_0))
    assert list(data.keys()) == [
        "swagger",
        "info",
        "host",
        "basePath",
        "schemes",
        "paths",
        "definitions",
        "parameters",
    ]
    assert data["swagger"] == "2.0"
    assert data["host"] == "petstore.example.com:8443"
    assert data["basePath"] == "/v1"
    assert data["schemes"] == ["https", "http"]

    assert data["paths"]["/pets"]["get"]["parameters"] == [{"$ref": "#/parameters/limit"}]
    assert data["paths"]["/pets"]["post"]["parameters"] == [{"$ref": "#/parameters/Pet"}]

    assert data["definitions"]["Pet"]["properties"]["id"] == {"type": "integer", "format": "int64"}
    assert data["parameters"] == {
        "limit": {"in": "query", "name": "limit", "type": "integer", "format": "int32"},
        "Pet": {"in": "body", "name": "body", "schema": {"$ref": "#/definitions/Pet"}},
    }


def test_document_yaml(petstore, spec_version, terse):
    text = serialize_as_yaml(petstore, spec_version, terse)
    assert yaml.safe_load(text) == json.loads(serialize_as_json(petstore, spec_version, terse))


def test_document_v2_servers():
    document = Document(info=Info(title="t", version="1"), servers=[Server(url="https://example.com/")])
    assert json.loads(serialize_as_json(document, SpecVersion.OpenApi2_0)) == {
        "swagger": "2.0",
        "info": {"title": "t", "version": "1"},
        "host": "example.com",
        "schemes": ["https"],
        "paths": {},
    }

    document = Document(info=Info(title="t", version="1"), servers=[Server(url="/api")])
    assert json.loads(serialize_as_json(document, SpecVersion.OpenApi2_0)) == {
        "swagger": "2.0",
        "info": {"title": "t", "version": "1"},
        "basePath": "/api",
        "paths": {},
    }


def test_document_minimal(spec_version):
    document = Document(info=Info(title="t", version="1"))
    data = json.loads(serialize_as_json(document, spec_version))
    assert "components" not in data
    assert data["paths"] == {}


def test_document_extensions():
    document = Document.model_validate({"info": {"title": "t", "version": "1"}, "x-logo": "logo.png"})
    data = json.loads(serialize_as_json(document, SpecVersion.OpenApi3_0))
    assert list(data.keys()) == ["openapi", "info", "paths", "x-logo"]


def test_document_path_malformed(spec_version):
    document = Document(info=Info(title="t", version="1"), paths={"pets": PathItem()})
    with pytest.raises(MalformedEntityError) as e:
        serialize_as_json(document, spec_version)
    assert "pets" in str(e.value)


def test_document_info_malformed(spec_version):
    document = Document(info=Info(title="", version="1"))
    with pytest.raises(MalformedEntityError):
        serialize_as_json(document, spec_version)


def test_components_resolve(petstore):
    parameter = petstore.resolve_reference(Reference(type=ReferenceType.parameter, id="limit"))
    assert parameter.name == "limit"

    schema = petstore.components.resolve(Reference(type=ReferenceType.schema, id="Pet"))
    assert schema.type == "object"

    with pytest.raises(ReferenceResolutionError) as e:
        petstore.resolve_reference(Reference(type=ReferenceType.schema, id="Dog"))
    assert "#/components/schemas/Dog" in str(e.value)

    with pytest.raises(ReferenceResolutionError):
        petstore.resolve_reference(Reference(type=ReferenceType.schema, id="Pet", externalResource="other.yaml"))

    with pytest.raises(ReferenceResolutionError):
        petstore.resolve_reference(Reference(type=ReferenceType.link, id="Pet"))


def test_components_not_a_definition():
    """
    a component carrying a reference to another component is written as pointer
    """
    components = Components(
        responses={
            "NotFound": Response(description="not found", reference=Reference(type=ReferenceType.response, id="Error"))
        }
    )
    document = Document(info=Info(title="t", version="1"), components=components)

    data = json.loads(serialize_as_json(document, SpecVersion.OpenApi3_0))
    assert data["components"]["responses"]["NotFound"] == {"$ref": "#/components/responses/Error"}

    data = json.loads(serialize_as_json(document, SpecVersion.OpenApi2_0))
    assert data["responses"]["NotFound"] == {"$ref": "#/responses/Error"}


def test_components_is_empty():
    assert Components().is_empty()
    assert not Components(schemas={"a": Schema()}).is_empty()
    assert not Components.model_validate({"x-a": 1}).is_empty()


@pytest.mark.parametrize(
    "element",
    [
        Reference(type=ReferenceType.schema, id="Pet"),
        Schema(type="string"),
        Example(value=1),
        MediaType(schema=Schema(type="string")),
        Parameter(name="p", in_=ParameterLocation.query),
        Header(schema=Schema(type="integer")),
        RequestBody(content={"application/json": MediaType(schema=Schema(type="object"))}),
        Response(description="ok"),
        Operation(responses={"200": Response(description="ok")}),
        PathItem(operations={OperationType.get: Operation()}),
        Components(schemas={"Pet": Schema(type="object")}),
        Info(title="t", version="1"),
        Server(url="https://example.com/v1"),
        Document(info=Info(title="t", version="1")),
    ],
    ids=lambda element: type(element).__name__,
)
def test_document_elements(element, spec_version, terse):
    """
    every model element can be written in both dialects
    """
    text = serialize_as_json(element, spec_version, terse)
    assert json.loads(text) == yaml.safe_load(serialize_as_yaml(element, spec_version, terse))


def test_media_type_v2():
    media = MediaType(schema=Schema(ref="Pet"), examples={"a": Example(summary="no value"), "b": Example(value=2)})
    assert json.loads(serialize_as_json(media, SpecVersion.OpenApi2_0)) == {
        "schema": {"$ref": "#/definitions/Pet"},
        "example": 2,
    }
    assert json.loads(serialize_as_json(MediaType(), SpecVersion.OpenApi2_0)) == {}


def test_server_v2():
    server = Server(url="http://example.com:8080/api/v1", description="staging")
    assert json.loads(serialize_as_json(server, SpecVersion.OpenApi2_0)) == {
        "host": "example.com:8080",
        "basePath": "/api/v1",
        "schemes": ["http"],
    }


def test_components_v2():
    components = Components(
        schemas={"Pet": Schema(type="object")},
        responses={"Ok": Response(description="ok")},
        headers={"X-Rate": Header(schema=Schema(type="integer"))},
    )
    assert json.loads(serialize_as_json(components, SpecVersion.OpenApi2_0)) == {
        "definitions": {"Pet": {"type": "object"}},
        "responses": {"Ok": {"description": "ok"}},
    }


def test_components_v2_shared_parameter_id():
    """
    parameters and requestBodies end up in the same 2.0 parameters map
    """
    components = Components(
        parameters={"Pet": Parameter(name="pet", in_=ParameterLocation.query)},
        requestBodies={"Pet": RequestBody(content={"application/json": MediaType(schema=Schema(ref="Pet"))})},
    )
    document = Document(info=Info(title="t", version="1"), components=components)

    with pytest.raises(MalformedEntityError) as e:
        serialize_as_json(document, SpecVersion.OpenApi2_0)
    assert "Pet" in str(e.value)

    with pytest.raises(MalformedEntityError):
        serialize_as_json(components, SpecVersion.OpenApi2_0)

    data = json.loads(serialize_as_json(document, SpecVersion.OpenApi3_0))
    assert list(data["components"].keys()) == ["parameters", "requestBodies"]
