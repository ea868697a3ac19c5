from typing import Any, Dict, Optional, TYPE_CHECKING

from pydantic import Field

from .base import ObjectExtended
from .example import Example
from .schemas import Schema
from .v20 import paths as v20_paths
from .v30.media import write_media_type

if TYPE_CHECKING:
    from .writers import OpenApiWriterBase


class MediaType(ObjectExtended):
    """
    A `MediaType`_ object provides schema and examples for the media type identified
    by its key.

    .. _MediaType: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#media-type-object
    """

    schema_: Optional[Schema] = Field(default=None, alias="schema")
    example: Optional[Any] = Field(default=None)
    examples: Dict[str, Example] = Field(default_factory=dict)

    def serialize_as_v3(self, writer: "OpenApiWriterBase") -> None:
        write_media_type(writer, self)

    def serialize_as_v2(self, writer: "OpenApiWriterBase") -> None:
        v20_paths.write_media_type(writer, self)
