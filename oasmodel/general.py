import logging
from typing import Optional, TYPE_CHECKING

from pydantic import Field

from .base import ObjectBase, ObjectExtended
from .enums import ReferenceType, SpecVersion
from .errors import MalformedEntityError

if TYPE_CHECKING:
    from .writers import OpenApiWriterBase

log = logging.getLogger("oasmodel.general")


class Reference(ObjectBase):
    """
    A `Reference Object`_ designates a component declared in the components of
    the (external) document.

    The pointer is built for the dialect it is written in, the id is not
    checked against any registry.

    .. _Reference Object: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#reference-object
    """

    type: ReferenceType = Field(...)
    id: str = Field(...)
    externalResource: Optional[str] = Field(default=None)

    @property
    def is_external(self) -> bool:
        return self.externalResource is not None

    def pointer(self, version: SpecVersion) -> Optional[str]:
        """
        :returns: the $ref value, None if the dialect has no place for the kind
        """
        if not self.id:
            raise MalformedEntityError(self, "Reference id must not be empty")

        if version == SpecVersion.OpenApi3_0:
            local = f"#/components/{self.type.value}/{self.id}"
        elif version == SpecVersion.OpenApi2_0:
            if (segment := self.type.v2_segment) is None:
                return None
            local = f"#/{segment}/{self.id}"
        else:
            raise ValueError(version)

        if self.is_external:
            return f"{self.externalResource}{local}"
        return local

    def _write(self, writer: "OpenApiWriterBase", version: SpecVersion) -> None:
        pointer = self.pointer(version)
        if pointer is None:
            raise MalformedEntityError(self, f"{self.type.value} can not be referenced in {version.value}")
        writer.write_start_object()
        writer.write_property("$ref", pointer)
        writer.write_end_object()

    def serialize_as_v3(self, writer: "OpenApiWriterBase") -> None:
        self._write(writer, SpecVersion.OpenApi3_0)

    def serialize_as_v2(self, writer: "OpenApiWriterBase") -> None:
        self._write(writer, SpecVersion.OpenApi2_0)


class Referenceable(ObjectExtended):
    """
    Elements which can be declared as component and referred to.

    ``serialize_as_v*`` writes the pointer if the element has a reference,
    ``serialize_as_v*_without_reference`` always writes the local fields.
    """

    reference: Optional[Reference] = Field(default=None)

    def serialize_as_v3(self, writer: "OpenApiWriterBase") -> None:
        if self.reference is not None and not writer.settings.should_inline(self.reference):
            self.reference.serialize_as_v3(writer)
            return
        self.serialize_as_v3_without_reference(writer)

    def serialize_as_v2(self, writer: "OpenApiWriterBase") -> None:
        if self.reference is not None and not writer.settings.should_inline(self.reference):
            if self.reference.type.v2_segment is not None:
                self.reference.serialize_as_v2(writer)
                return
            log.debug(f"{self.reference.type.value} can not be referenced in 2.0 - writing {self.reference.id} inline")
        self.serialize_as_v2_without_reference(writer)

    def serialize_as_v3_without_reference(self, writer: "OpenApiWriterBase") -> None:
        raise NotImplementedError("specific")

    def serialize_as_v2_without_reference(self, writer: "OpenApiWriterBase") -> None:
        raise NotImplementedError("specific")
