from typing import TYPE_CHECKING

from ..errors import MalformedEntityError
from .schemas import write_schema

if TYPE_CHECKING:
    from ..example import Example
    from ..media import MediaType
    from ..writers import OpenApiWriterBase


def write_example(writer: "OpenApiWriterBase", example: "Example") -> None:
    if "value" in example.model_fields_set and example.externalValue is not None:
        raise MalformedEntityError(example, "value and externalValue are mutually exclusive")

    writer.write_start_object()
    writer.write_property("summary", example.summary)
    writer.write_property("description", example.description)
    if "value" in example.model_fields_set:
        writer.write_required_property("value", example.value)
    writer.write_property("externalValue", example.externalValue)
    example.write_extensions(writer)
    writer.write_end_object()


def write_media_type(writer: "OpenApiWriterBase", media: "MediaType") -> None:
    writer.write_start_object()
    writer.write_optional_object("schema", media.schema_, write_schema)
    if "example" in media.model_fields_set:
        writer.write_required_property("example", media.example)
    writer.write_optional_map("examples", media.examples, lambda w, e: e.serialize_as_v3(w))
    media.write_extensions(writer)
    writer.write_end_object()
