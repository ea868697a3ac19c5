from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..paths import RequestBody, Response, Operation, PathItem
    from ..writers import OpenApiWriterBase


def write_request_body(writer: "OpenApiWriterBase", request_body: "RequestBody") -> None:
    writer.write_start_object()
    writer.write_property("description", request_body.description)
    writer.write_optional_map("content", request_body.content, lambda w, m: m.serialize_as_v3(w))
    writer.write_property("required", request_body.required, False)
    request_body.write_extensions(writer)
    writer.write_end_object()


def write_response(writer: "OpenApiWriterBase", response: "Response") -> None:
    writer.write_start_object()
    writer.write_required_property("description", response.description)
    writer.write_optional_map("headers", response.headers, lambda w, h: h.serialize_as_v3(w))
    writer.write_optional_map("content", response.content, lambda w, m: m.serialize_as_v3(w))
    response.write_extensions(writer)
    writer.write_end_object()


def write_operation(writer: "OpenApiWriterBase", operation: "Operation") -> None:
    writer.write_start_object()
    writer.write_property("tags", operation.tags or None)
    writer.write_property("summary", operation.summary)
    writer.write_property("description", operation.description)
    writer.write_property("operationId", operation.operationId)
    writer.write_optional_collection("parameters", operation.parameters, lambda w, p: p.serialize_as_v3(w))
    writer.write_optional_object("requestBody", operation.requestBody, lambda w, r: r.serialize_as_v3(w))
    writer.write_required_map("responses", operation.responses, lambda w, r: r.serialize_as_v3(w))
    writer.write_property("deprecated", operation.deprecated, False)
    operation.write_extensions(writer)
    writer.write_end_object()


def write_path_item(writer: "OpenApiWriterBase", path_item: "PathItem") -> None:
    writer.write_start_object()
    writer.write_property("summary", path_item.summary)
    writer.write_property("description", path_item.description)
    for method, operation in path_item.operations.items():
        writer.write_property_name(method.value)
        operation.serialize_as_v3(writer)
    writer.write_optional_collection("parameters", path_item.parameters, lambda w, p: p.serialize_as_v3(w))
    path_item.write_extensions(writer)
    writer.write_end_object()
