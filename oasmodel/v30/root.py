from typing import Dict, TYPE_CHECKING

from ..enums import ReferenceType
from ..errors import MalformedEntityError
from .schemas import write_schema

if TYPE_CHECKING:
    from ..components import Components
    from ..general import Referenceable
    from ..info import Info
    from ..root import Document
    from ..servers import Server
    from ..writers import OpenApiWriterBase

OPENAPI_VERSION = "3.0.4"


def write_info(writer: "OpenApiWriterBase", info: "Info") -> None:
    if not info.title or not info.version:
        raise MalformedEntityError(info, "Info title and version must not be empty")

    writer.write_start_object()
    writer.write_property("title", info.title)
    writer.write_property("description", info.description)
    writer.write_property("termsOfService", info.termsOfService)
    writer.write_property("version", info.version)
    info.write_extensions(writer)
    writer.write_end_object()


def write_server(writer: "OpenApiWriterBase", server: "Server") -> None:
    writer.write_start_object()
    writer.write_property("url", server.url)
    writer.write_property("description", server.description)
    server.write_extensions(writer)
    writer.write_end_object()


def is_definition(kind: ReferenceType, key: str, element: "Referenceable") -> bool:
    """the element is the component its reference points to"""
    r = element.reference
    return r is not None and not r.is_external and r.type == kind and r.id == key


def _write_components(
    writer: "OpenApiWriterBase", name: str, kind: ReferenceType, values: Dict[str, "Referenceable"]
) -> None:
    if not values:
        return
    writer.write_property_name(name)
    writer.write_start_object()
    for k, v in values.items():
        writer.write_property_name(k)
        if is_definition(kind, k, v):
            v.serialize_as_v3_without_reference(writer)
        else:
            v.serialize_as_v3(writer)
    writer.write_end_object()


def write_components(writer: "OpenApiWriterBase", components: "Components") -> None:
    writer.write_start_object()
    writer.write_optional_map("schemas", components.schemas, write_schema)
    _write_components(writer, "responses", ReferenceType.response, components.responses)
    _write_components(writer, "parameters", ReferenceType.parameter, components.parameters)
    _write_components(writer, "examples", ReferenceType.example, components.examples)
    _write_components(writer, "requestBodies", ReferenceType.requestBody, components.requestBodies)
    _write_components(writer, "headers", ReferenceType.header, components.headers)
    components.write_extensions(writer)
    writer.write_end_object()


def check_paths(document: "Document") -> None:
    for path in document.paths.keys():
        if not path.startswith("/"):
            raise MalformedEntityError(document, f"path {path} must start with /")


def write_document(writer: "OpenApiWriterBase", document: "Document") -> None:
    check_paths(document)

    writer.write_start_object()
    writer.write_required_property("openapi", OPENAPI_VERSION)
    writer.write_property_name("info")
    document.info.serialize_as_v3(writer)
    writer.write_optional_collection("servers", document.servers, lambda w, s: s.serialize_as_v3(w))
    writer.write_required_map("paths", document.paths, lambda w, p: p.serialize_as_v3(w))
    if not document.components.is_empty():
        writer.write_optional_object("components", document.components, lambda w, c: c.serialize_as_v3(w))
    document.write_extensions(writer)
    writer.write_end_object()
