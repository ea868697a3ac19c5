import logging
from typing import Optional, TYPE_CHECKING

import more_itertools

from ..enums import ParameterLocation
from ..errors import MalformedEntityError
from .schemas import write_flattened_schema, write_schema

if TYPE_CHECKING:
    from ..parameter import Parameter, Header, ParameterBase
    from ..paths import RequestBody
    from ..schemas import Schema
    from ..writers import OpenApiWriterBase

log = logging.getLogger("oasmodel.v20.parameter")

FORM_MEDIA_TYPES = frozenset(["application/x-www-form-urlencoded", "multipart/form-data"])


def _schema_of(element: "ParameterBase") -> Optional["Schema"]:
    """the schema, or the schema of the first content entry"""
    if element.schema_ is not None:
        return element.schema_
    if (media := more_itertools.first(element.content.values(), None)) is not None:
        return media.schema_
    return None


def write_parameter(writer: "OpenApiWriterBase", parameter: "Parameter") -> None:
    """
    https://github.com/OAI/OpenAPI-Specification/blob/main/versions/2.0.md#parameter-object
    """
    if not parameter.name:
        raise MalformedEntityError(parameter, "Parameter name must not be empty")
    if parameter.in_ == ParameterLocation.cookie:
        log.debug(f"Parameter {parameter.name} - cookie parameters do not exist in 2.0")

    writer.write_start_object()
    writer.write_property("in", parameter.in_)
    writer.write_property("name", parameter.name)
    writer.write_property("description", parameter.description)
    writer.write_property("required", parameter.required, False)
    writer.write_property("allowEmptyValue", parameter.allowEmptyValue, False)
    write_flattened_schema(writer, _schema_of(parameter))
    parameter.write_extensions(writer)
    writer.write_end_object()


def write_header(writer: "OpenApiWriterBase", header: "Header") -> None:
    """
    https://github.com/OAI/OpenAPI-Specification/blob/main/versions/2.0.md#header-object
    """
    writer.write_start_object()
    writer.write_property("description", header.description)
    write_flattened_schema(writer, _schema_of(header))
    header.write_extensions(writer)
    writer.write_end_object()


def is_form(request_body: "RequestBody") -> bool:
    return bool(request_body.content) and set(request_body.content.keys()) <= FORM_MEDIA_TYPES


def write_body_parameter(writer: "OpenApiWriterBase", request_body: "RequestBody") -> None:
    """
    a RequestBody becomes the body parameter, the schema of the first media type is used
    """
    media = more_itertools.first(request_body.content.values(), None)

    writer.write_start_object()
    writer.write_property("in", "body")
    writer.write_property("name", request_body.extensions.get("bodyName", "body"))
    writer.write_property("description", request_body.description)
    writer.write_property("required", request_body.required, False)
    writer.write_property_name("schema")
    if media is not None and media.schema_ is not None:
        write_schema(writer, media.schema_)
    else:
        writer.write_start_object()
        writer.write_end_object()
    for k, v in request_body.extensions.items():
        if k == "bodyName":
            continue
        writer.write_property_name(f"x-{k}")
        writer.write_any(v)
    writer.write_end_object()


def write_form_data_parameters(writer: "OpenApiWriterBase", request_body: "RequestBody") -> None:
    """
    a form RequestBody becomes one formData parameter per property of its schema,
    written as values of the enclosing parameters array
    """
    media = more_itertools.first(request_body.content.values())
    schema = media.schema_
    if schema is None or schema.is_reference():
        log.debug("form RequestBody without inline schema - no formData parameters")
        return

    for name, property_ in schema.properties.items():
        writer.write_start_object()
        writer.write_property("in", "formData")
        writer.write_property("name", name)
        writer.write_property("description", property_.description)
        writer.write_property("required", name in schema.required, False)
        if property_.type == "string" and property_.format == "binary":
            writer.write_property("type", "file")
        else:
            write_flattened_schema(writer, property_)
        writer.write_end_object()
