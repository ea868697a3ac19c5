import logging
from typing import Dict, List, TYPE_CHECKING

import more_itertools
import yarl

from ..enums import ReferenceType
from ..errors import MalformedEntityError
from ..v30.root import check_paths, is_definition
from .parameter import write_body_parameter
from .schemas import write_schema

if TYPE_CHECKING:
    from ..components import Components
    from ..general import Referenceable
    from ..root import Document
    from ..servers import Server
    from ..writers import OpenApiWriterBase

log = logging.getLogger("oasmodel.v20.root")

SWAGGER_VERSION = "2.0"


def _write_server(writer: "OpenApiWriterBase", servers: List["Server"]) -> None:
    """
    host, basePath and schemes are taken from the server urls,
    the host and basePath of the first server win
    """
    if not servers:
        return

    urls = [yarl.URL(server.url) for server in servers]
    first = urls[0]
    if first.is_absolute():
        host = first.host if first.is_default_port() else f"{first.host}:{first.port}"
        writer.write_property("host", host)
    if first.path not in ("", "/"):
        writer.write_property("basePath", first.path)

    schemes = list(more_itertools.unique_everseen(url.scheme for url in urls if url.is_absolute()))
    writer.write_property("schemes", schemes or None)

    if len(servers) > 1:
        log.debug(f"2.0 has a single host - {len(servers) - 1} servers dropped")


def write_server(writer: "OpenApiWriterBase", server: "Server") -> None:
    """a single Server as the host, basePath and schemes fragment of the root object"""
    writer.write_start_object()
    _write_server(writer, [server])
    writer.write_end_object()


def _write_fragment(
    writer: "OpenApiWriterBase", name: str, kind: ReferenceType, values: Dict[str, "Referenceable"]
) -> None:
    if not values:
        return
    writer.write_property_name(name)
    writer.write_start_object()
    for k, v in values.items():
        writer.write_property_name(k)
        if is_definition(kind, k, v):
            v.serialize_as_v2_without_reference(writer)
        else:
            v.serialize_as_v2(writer)
    writer.write_end_object()


def check_components(components: "Components") -> None:
    """parameters and requestBodies share the 2.0 parameters root, their ids must not collide"""
    if shared := components.parameters.keys() & components.requestBodies.keys():
        raise MalformedEntityError(
            components, f"parameters and requestBodies {sorted(shared)} share the 2.0 #/parameters/ ids"
        )


def write_components(writer: "OpenApiWriterBase", components: "Components") -> None:
    """
    the components are spread over the root object, definitions, parameters and responses
    """
    check_components(components)

    writer.write_optional_map("definitions", components.schemas, write_schema)

    if components.parameters or components.requestBodies:
        writer.write_property_name("parameters")
        writer.write_start_object()
        for k, v in components.parameters.items():
            writer.write_property_name(k)
            if is_definition(ReferenceType.parameter, k, v):
                v.serialize_as_v2_without_reference(writer)
            else:
                v.serialize_as_v2(writer)
        for k, v in components.requestBodies.items():
            writer.write_property_name(k)
            if is_definition(ReferenceType.requestBody, k, v):
                write_body_parameter(writer, v)
            else:
                v.serialize_as_v2(writer)
        writer.write_end_object()

    _write_fragment(writer, "responses", ReferenceType.response, components.responses)

    for name in ["examples", "headers"]:
        if getattr(components, name):
            log.debug(f"2.0 has no {name} components - dropped")


def write_document(writer: "OpenApiWriterBase", document: "Document") -> None:
    """
    https://github.com/OAI/OpenAPI-Specification/blob/main/versions/2.0.md#swagger-object
    """
    check_paths(document)
    check_components(document.components)

    writer.write_start_object()
    writer.write_required_property("swagger", SWAGGER_VERSION)
    writer.write_property_name("info")
    document.info.serialize_as_v2(writer)
    _write_server(writer, document.servers)
    writer.write_required_map("paths", document.paths, lambda w, p: p.serialize_as_v2(w))
    write_components(writer, document.components)
    document.write_extensions(writer)
    writer.write_end_object()
