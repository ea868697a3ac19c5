from typing import Optional, TYPE_CHECKING

from pydantic import Field

from .base import ObjectExtended
from .v30.root import write_info

if TYPE_CHECKING:
    from .writers import OpenApiWriterBase


class Info(ObjectExtended):
    """
    An Info object provides metadata about the API.

    .. _Info Object: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#info-object
    """

    title: str = Field(...)
    description: Optional[str] = Field(default=None)
    termsOfService: Optional[str] = Field(default=None)
    version: str = Field(...)

    def serialize_as_v3(self, writer: "OpenApiWriterBase") -> None:
        write_info(writer, self)

    def serialize_as_v2(self, writer: "OpenApiWriterBase") -> None:
        write_info(writer, self)
