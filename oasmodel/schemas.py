import enum
from typing import Union, List, Any, Optional, Dict, TYPE_CHECKING

from pydantic import Field, model_validator

from .base import ObjectExtended
from .enums import ReferenceType, SpecVersion
from .general import Reference

if TYPE_CHECKING:
    from .writers import OpenApiWriterBase


PRIMITIVE_TYPES = frozenset(["string", "number", "integer", "boolean"])
STRUCTURED_TYPES = frozenset(["object", "array"])


class SchemaShape(enum.Enum):
    """the closed set of forms a Schema can take when it has to be flattened"""

    reference = "reference"
    primitive = "primitive"
    composition = "composition"
    structured = "structured"
    empty = "empty"


class Schema(ObjectExtended):
    """
    The `Schema Object`_ allows the definition of input and output data types.

    A Schema either refers to a shared schema by its component id (``ref``) or
    owns its keywords, never both.

    .. _Schema Object: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#schema-object
    """

    ref: Optional[str] = Field(default=None, alias="$ref")

    title: Optional[str] = Field(default=None)
    description: Optional[str] = Field(default=None)
    type: Optional[str] = Field(default=None)
    format: Optional[str] = Field(default=None)
    enum: Optional[List[Any]] = Field(default=None)
    default: Optional[Any] = Field(default=None)
    nullable: Optional[bool] = Field(default=None)

    multipleOf: Optional[Union[int, float]] = Field(default=None)
    maximum: Optional[Union[int, float]] = Field(default=None)
    exclusiveMaximum: Optional[bool] = Field(default=None)
    minimum: Optional[Union[int, float]] = Field(default=None)
    exclusiveMinimum: Optional[bool] = Field(default=None)
    maxLength: Optional[int] = Field(default=None)
    minLength: Optional[int] = Field(default=None)
    pattern: Optional[str] = Field(default=None)
    maxItems: Optional[int] = Field(default=None)
    minItems: Optional[int] = Field(default=None)
    uniqueItems: Optional[bool] = Field(default=None)
    maxProperties: Optional[int] = Field(default=None)
    minProperties: Optional[int] = Field(default=None)
    required: List[str] = Field(default_factory=list)

    allOf: List["Schema"] = Field(default_factory=list)
    oneOf: List["Schema"] = Field(default_factory=list)
    anyOf: List["Schema"] = Field(default_factory=list)
    not_: Optional["Schema"] = Field(default=None, alias="not")
    items: Optional["Schema"] = Field(default=None)
    properties: Dict[str, "Schema"] = Field(default_factory=dict)
    additionalProperties: Optional[Union[bool, "Schema"]] = Field(default=None)

    readOnly: Optional[bool] = Field(default=None)
    writeOnly: Optional[bool] = Field(default=None)
    deprecated: Optional[bool] = Field(default=None)
    example: Optional[Any] = Field(default=None)

    @model_validator(mode="after")
    def validate_Schema_ref(self) -> "Schema":
        if self.ref is not None and (siblings := self.model_fields_set - {"ref"}):
            raise ValueError(f"Schema $ref {self.ref} can not be combined with {sorted(siblings)}")
        return self

    def is_reference(self) -> bool:
        return self.ref is not None

    def referenced_id(self) -> Optional[str]:
        return self.ref

    def primitive_type(self) -> Optional[str]:
        if self.type in PRIMITIVE_TYPES:
            return self.type
        return None

    def primitive_format(self) -> Optional[str]:
        return self.format

    def composition_alternatives(self) -> List["Schema"]:
        """the oneOf alternatives followed by the anyOf alternatives"""
        return self.oneOf + self.anyOf

    def shape(self) -> SchemaShape:
        if self.is_reference():
            return SchemaShape.reference
        if self.primitive_type() is not None:
            return SchemaShape.primitive
        if self.composition_alternatives():
            return SchemaShape.composition
        if self.type in STRUCTURED_TYPES:
            return SchemaShape.structured
        return SchemaShape.empty

    def pointer(self, version: SpecVersion) -> Optional[str]:
        if not self.is_reference():
            return None
        return Reference(type=ReferenceType.schema, id=self.ref).pointer(version)

    def serialize_as_v3(self, writer: "OpenApiWriterBase") -> None:
        self.render(writer, SpecVersion.OpenApi3_0)

    def serialize_as_v2(self, writer: "OpenApiWriterBase") -> None:
        from .v20.schemas import write_schema

        write_schema(writer, self)

    def render(self, writer: "OpenApiWriterBase", version: SpecVersion) -> None:
        """
        write the Schema as is, only the $ref pointers are formatted for the version
        """
        writer.write_start_object()
        if self.is_reference():
            writer.write_property("$ref", self.pointer(version))
            writer.write_end_object()
            return

        def nested(w, s: "Schema"):
            s.render(w, version)

        writer.write_property("title", self.title)
        writer.write_property("description", self.description)
        writer.write_property("type", self.type)
        writer.write_property("format", self.format)
        writer.write_property("enum", self.enum)
        if "default" in self.model_fields_set:
            writer.write_required_property("default", self.default)
        writer.write_property("nullable", self.nullable)
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
            writer.write_property(name, getattr(self, name))
        writer.write_property("required", self.required or None)
        writer.write_optional_collection("allOf", self.allOf, nested)
        writer.write_optional_collection("oneOf", self.oneOf, nested)
        writer.write_optional_collection("anyOf", self.anyOf, nested)
        writer.write_optional_object("not", self.not_, nested)
        writer.write_optional_object("items", self.items, nested)
        writer.write_optional_map("properties", self.properties, nested)
        if isinstance(self.additionalProperties, Schema):
            writer.write_optional_object("additionalProperties", self.additionalProperties, nested)
        else:
            writer.write_property("additionalProperties", self.additionalProperties)
        writer.write_property("readOnly", self.readOnly)
        writer.write_property("writeOnly", self.writeOnly)
        writer.write_property("deprecated", self.deprecated)
        if "example" in self.model_fields_set:
            writer.write_required_property("example", self.example)
        self.write_extensions(writer)
        writer.write_end_object()
