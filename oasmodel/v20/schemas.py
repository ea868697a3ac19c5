import logging
from typing import Optional, TYPE_CHECKING

import more_itertools

from ..enums import SpecVersion
from ..schemas import Schema, SchemaShape

if TYPE_CHECKING:
    from ..writers import OpenApiWriterBase

log = logging.getLogger("oasmodel.v20.schemas")


def write_flattened_schema(writer: "OpenApiWriterBase", schema: Optional[Schema]) -> None:
    """
    2.0 parameters and headers have no schema, the type information is written
    onto the element itself.

    This is lossy:
      * a $ref can not be expressed at all
      * a oneOf/anyOf has no single type, only the format of the first alternative is kept
      * object and array keep the type only
    """
    if schema is None:
        return

    shape = schema.shape()
    if shape == SchemaShape.reference:
        log.debug(f"Schema $ref {schema.referenced_id()} can not be expressed in 2.0 - dropped")
    elif shape == SchemaShape.primitive:
        writer.write_property("type", schema.primitive_type())
        writer.write_property("format", schema.primitive_format())
    elif shape == SchemaShape.composition:
        first = more_itertools.first(schema.composition_alternatives())
        log.debug("oneOf/anyOf can not be expressed in 2.0 - keeping the format of the first alternative")
        writer.write_property("format", first.primitive_format())
    elif shape == SchemaShape.structured:
        writer.write_property("type", schema.type)
    elif shape == SchemaShape.empty:
        pass
    else:
        raise ValueError(shape)


def write_schema(writer: "OpenApiWriterBase", schema: Schema) -> None:
    """
    write a Schema for bodies and definitions, keywords unknown to 2.0 are dropped

    https://github.com/OAI/OpenAPI-Specification/blob/main/versions/2.0.md#schema-object
    """
    writer.write_start_object()
    if schema.is_reference():
        writer.write_property("$ref", schema.pointer(SpecVersion.OpenApi2_0))
        writer.write_end_object()
        return

    dropped = [i for i in ["oneOf", "anyOf", "not_", "writeOnly", "deprecated"] if getattr(schema, i)]
    if dropped:
        log.debug(f"Schema {schema.title or ''} keywords {dropped} can not be expressed in 2.0 - dropped")

    writer.write_property("title", schema.title)
    writer.write_property("description", schema.description)
    writer.write_property("type", schema.type)
    writer.write_property("format", schema.format)
    writer.write_property("enum", schema.enum)
    if "default" in schema.model_fields_set:
        writer.write_required_property("default", schema.default)
    for name in [
        "multipleOf",
        "maximum",
        "exclusiveMaximum",
        "minimum",
        "exclusiveMinimum",
        "maxLength",
        "minLength",
        "pattern",
        "maxItems",
        "minItems",
        "uniqueItems",
        "maxProperties",
        "minProperties",
    ]:
        writer.write_property(name, getattr(schema, name))
    writer.write_property("required", schema.required or None)
    writer.write_optional_collection("allOf", schema.allOf, write_schema)
    writer.write_optional_object("items", schema.items, write_schema)
    writer.write_optional_map("properties", schema.properties, write_schema)
    if isinstance(schema.additionalProperties, Schema):
        writer.write_optional_object("additionalProperties", schema.additionalProperties, write_schema)
    else:
        writer.write_property("additionalProperties", schema.additionalProperties)
    writer.write_property("readOnly", schema.readOnly)
    if "example" in schema.model_fields_set:
        writer.write_required_property("example", schema.example)
    writer.write_property("x-nullable", schema.nullable)
    schema.write_extensions(writer)
    writer.write_end_object()
