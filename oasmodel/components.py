from typing import Dict, Union, TYPE_CHECKING

from pydantic import Field

from .base import ObjectExtended
from .enums import ReferenceType, SpecVersion
from .errors import ReferenceResolutionError
from .example import Example
from .general import Reference
from .parameter import Header, Parameter
from .paths import RequestBody, Response
from .schemas import Schema
from .v20 import root as v20_root
from .v30.root import write_components

if TYPE_CHECKING:
    from .writers import OpenApiWriterBase

ComponentType = Union[Schema, Response, Parameter, Example, RequestBody, Header]


class Components(ObjectExtended):
    """
    A `Components Object`_ holds the reusable elements of a document and is
    the registry References are looked up in.

    .. _Components Object: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#components-object
    """

    schemas: Dict[str, Schema] = Field(default_factory=dict)
    responses: Dict[str, Response] = Field(default_factory=dict)
    parameters: Dict[str, Parameter] = Field(default_factory=dict)
    examples: Dict[str, Example] = Field(default_factory=dict)
    requestBodies: Dict[str, RequestBody] = Field(default_factory=dict)
    headers: Dict[str, Header] = Field(default_factory=dict)

    def _registry(self, kind: ReferenceType) -> Dict[str, ComponentType]:
        return {
            ReferenceType.schema: self.schemas,
            ReferenceType.response: self.responses,
            ReferenceType.parameter: self.parameters,
            ReferenceType.example: self.examples,
            ReferenceType.requestBody: self.requestBodies,
            ReferenceType.header: self.headers,
        }.get(kind, {})

    def is_empty(self) -> bool:
        return not any(self._registry(kind) for kind in ReferenceType) and not self.extensions

    def resolve(self, reference: Reference) -> ComponentType:
        """
        :returns: the component the reference points to
        :raises ReferenceResolutionError: for external references and unknown ids
        """
        if reference.is_external:
            raise ReferenceResolutionError(
                f"Reference {reference.pointer(SpecVersion.OpenApi3_0)} is external", reference
            )
        registry = self._registry(reference.type)
        if reference.id not in registry:
            raise ReferenceResolutionError(
                f"Invalid Reference {reference.pointer(SpecVersion.OpenApi3_0)} - not in components", reference
            )
        return registry[reference.id]

    def serialize_as_v3(self, writer: "OpenApiWriterBase") -> None:
        write_components(writer, self)

    def serialize_as_v2(self, writer: "OpenApiWriterBase") -> None:
        # the 2.0 component roots, without the rest of the document
        writer.write_start_object()
        v20_root.write_components(writer, self)
        writer.write_end_object()
