from typing import Dict, List, TYPE_CHECKING

from pydantic import Field

from .base import ObjectExtended
from .components import Components, ComponentType
from .general import Reference
from .info import Info
from .paths import PathItem
from .servers import Server
from .v20 import root as v20_root
from .v30 import root as v30_root

if TYPE_CHECKING:
    from .writers import OpenApiWriterBase


class Document(ObjectExtended):
    """
    The root of a description document, written as ``swagger: "2.0"`` or
    ``openapi: 3.0.x``.

    .. _OpenAPI Object: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#openapi-object
    """

    info: Info = Field(...)
    servers: List[Server] = Field(default_factory=list)
    paths: Dict[str, PathItem] = Field(default_factory=dict)
    components: Components = Field(default_factory=Components)

    def resolve_reference(self, reference: Reference) -> ComponentType:
        return self.components.resolve(reference)

    def serialize_as_v3(self, writer: "OpenApiWriterBase") -> None:
        v30_root.write_document(writer, self)

    def serialize_as_v2(self, writer: "OpenApiWriterBase") -> None:
        v20_root.write_document(writer, self)
