import logging
from typing import Any, Dict, TYPE_CHECKING

import more_itertools

from ..enums import OperationType
from .parameter import is_form, write_form_data_parameters
from .schemas import write_schema

if TYPE_CHECKING:
    from ..media import MediaType
    from ..paths import Response, Operation, PathItem
    from ..writers import OpenApiWriterBase

log = logging.getLogger("oasmodel.v20.paths")

_MISSING = object()


def _example_of(media: "MediaType") -> Any:
    if "example" in media.model_fields_set:
        return media.example
    for example in media.examples.values():
        if "value" in example.model_fields_set:
            return example.value
    return _MISSING


def write_media_type(writer: "OpenApiWriterBase", media: "MediaType") -> None:
    """
    2.0 has no MediaType Object, the schema and example are what a Response
    keeps of it
    """
    writer.write_start_object()
    writer.write_optional_object("schema", media.schema_, write_schema)
    if (value := _example_of(media)) is not _MISSING:
        writer.write_required_property("example", value)
    media.write_extensions(writer)
    writer.write_end_object()


def write_response(writer: "OpenApiWriterBase", response: "Response") -> None:
    """
    https://github.com/OAI/OpenAPI-Specification/blob/main/versions/2.0.md#response-object
    """
    media = more_itertools.first(response.content.values(), None)

    writer.write_start_object()
    writer.write_required_property("description", response.description)
    if media is not None and media.schema_ is not None:
        writer.write_optional_object("schema", media.schema_, write_schema)

    examples: Dict[str, Any] = {}
    for content_type, m in response.content.items():
        if (value := _example_of(m)) is not _MISSING:
            examples[content_type] = value
    writer.write_property("examples", examples or None)

    writer.write_optional_map("headers", response.headers, lambda w, h: h.serialize_as_v2(w))
    response.write_extensions(writer)
    writer.write_end_object()


def write_operation(writer: "OpenApiWriterBase", operation: "Operation") -> None:
    """
    https://github.com/OAI/OpenAPI-Specification/blob/main/versions/2.0.md#operation-object
    """
    body = operation.requestBody
    consumes = list(body.content.keys()) if body is not None else []
    produces = list(
        more_itertools.unique_everseen(
            more_itertools.flatten(response.content.keys() for response in operation.responses.values())
        )
    )

    writer.write_start_object()
    writer.write_property("tags", operation.tags or None)
    writer.write_property("summary", operation.summary)
    writer.write_property("description", operation.description)
    writer.write_property("operationId", operation.operationId)
    writer.write_property("consumes", consumes or None)
    writer.write_property("produces", produces or None)

    if operation.parameters or body is not None:
        writer.write_property_name("parameters")
        writer.write_start_array()
        for parameter in operation.parameters:
            parameter.serialize_as_v2(writer)
        if body is not None:
            if body.reference is None and is_form(body):
                write_form_data_parameters(writer, body)
            else:
                body.serialize_as_v2(writer)
        writer.write_end_array()

    writer.write_required_map("responses", operation.responses, lambda w, r: r.serialize_as_v2(w))
    writer.write_property("deprecated", operation.deprecated, False)
    operation.write_extensions(writer)
    writer.write_end_object()


def write_path_item(writer: "OpenApiWriterBase", path_item: "PathItem") -> None:
    """
    https://github.com/OAI/OpenAPI-Specification/blob/main/versions/2.0.md#path-item-object
    """
    writer.write_start_object()
    for method, operation in path_item.operations.items():
        if method == OperationType.trace:
            log.debug("trace operations do not exist in 2.0 - dropped")
            continue
        writer.write_property_name(method.value)
        operation.serialize_as_v2(writer)
    writer.write_optional_collection("parameters", path_item.parameters, lambda w, p: p.serialize_as_v2(w))
    path_item.write_extensions(writer)
    writer.write_end_object()
