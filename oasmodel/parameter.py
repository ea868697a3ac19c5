from typing import Any, Dict, Optional, TYPE_CHECKING

from pydantic import Field

from .enums import ParameterLocation, ParameterStyle
from .example import Example
from .general import Referenceable
from .media import MediaType
from .schemas import Schema
from .defaults import effective_explode, effective_style
from .v20 import parameter as v20_parameter
from .v30 import parameter as v30_parameter

if TYPE_CHECKING:
    from .writers import OpenApiWriterBase


class ParameterBase(Referenceable):
    """
    The attributes shared by `Parameter Object`_ and `Header Object`_.

    ``style`` and ``explode`` are kept as declared, unset stays unset, see
    :attr:`effective_style` and :attr:`effective_explode` for the values in use.

    .. _Parameter Object: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#parameter-object
    .. _Header Object: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#header-object
    """

    description: Optional[str] = Field(default=None)
    required: bool = Field(default=False)
    deprecated: bool = Field(default=False)
    allowEmptyValue: bool = Field(default=False)

    style: Optional[ParameterStyle] = Field(default=None)
    explode: Optional[bool] = Field(default=None)
    allowReserved: bool = Field(default=False)
    schema_: Optional[Schema] = Field(default=None, alias="schema")
    example: Optional[Any] = Field(default=None)
    examples: Dict[str, Example] = Field(default_factory=dict)

    content: Dict[str, MediaType] = Field(default_factory=dict)

    @property
    def location(self) -> Optional[ParameterLocation]:
        return ParameterLocation.header

    @property
    def effective_style(self) -> ParameterStyle:
        return effective_style(self.location, self.style)

    @property
    def effective_explode(self) -> bool:
        return effective_explode(self.effective_style, self.explode)


class Parameter(ParameterBase):
    """
    A single operation parameter, unique by name and location.

    A path Parameter is required, this is not enforced.
    """

    name: str = Field()
    in_: Optional[ParameterLocation] = Field(default=None, alias="in")

    @property
    def location(self) -> Optional[ParameterLocation]:
        return self.in_

    def serialize_as_v3_without_reference(self, writer: "OpenApiWriterBase") -> None:
        v30_parameter.write_parameter(writer, self)

    def serialize_as_v2_without_reference(self, writer: "OpenApiWriterBase") -> None:
        v20_parameter.write_parameter(writer, self)


class Header(ParameterBase):
    def serialize_as_v3_without_reference(self, writer: "OpenApiWriterBase") -> None:
        v30_parameter.write_header(writer, self)

    def serialize_as_v2_without_reference(self, writer: "OpenApiWriterBase") -> None:
        v20_parameter.write_header(writer, self)
