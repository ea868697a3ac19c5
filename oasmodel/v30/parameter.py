from typing import Optional, TYPE_CHECKING

from ..defaults import default_explode, default_style, effective_explode, effective_style
from ..enums import ParameterLocation, ParameterStyle
from ..errors import MalformedEntityError
from .schemas import write_schema

if TYPE_CHECKING:
    from ..parameter import Parameter, Header, ParameterBase
    from ..writers import OpenApiWriterBase


def _write_style(
    writer: "OpenApiWriterBase",
    location: Optional[ParameterLocation],
    style: Optional[ParameterStyle],
    explode: Optional[bool],
) -> None:
    """
    style and explode are only written if they differ from the values a
    reader would assume in their absence
    """
    style_ = effective_style(location, style)
    if style_ != default_style(location):
        writer.write_property("style", style_)

    explode_ = effective_explode(style_, explode)
    if explode_ != default_explode(style_):
        writer.write_property("explode", explode_)


def _write_body(writer: "OpenApiWriterBase", element: "ParameterBase") -> None:
    writer.write_property("description", element.description)
    writer.write_property("required", element.required, False)
    writer.write_property("deprecated", element.deprecated, False)
    writer.write_property("allowEmptyValue", element.allowEmptyValue, False)
    _write_style(writer, element.location, element.style, element.explode)
    writer.write_property("allowReserved", element.allowReserved, False)
    writer.write_optional_object("schema", element.schema_, write_schema)
    if "example" in element.model_fields_set:
        writer.write_required_property("example", element.example)
    writer.write_optional_map("examples", element.examples, lambda w, e: e.serialize_as_v3(w))
    writer.write_optional_map("content", element.content, lambda w, m: m.serialize_as_v3(w))
    element.write_extensions(writer)


def write_parameter(writer: "OpenApiWriterBase", parameter: "Parameter") -> None:
    if not parameter.name:
        raise MalformedEntityError(parameter, "Parameter name must not be empty")

    writer.write_start_object()
    writer.write_property("name", parameter.name)
    writer.write_property("in", parameter.in_)
    _write_body(writer, parameter)
    writer.write_end_object()


def write_header(writer: "OpenApiWriterBase", header: "Header") -> None:
    writer.write_start_object()
    _write_body(writer, header)
    writer.write_end_object()
