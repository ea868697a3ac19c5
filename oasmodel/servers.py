from typing import Optional, TYPE_CHECKING

from pydantic import Field

from .base import ObjectExtended
from .v20 import root as v20_root
from .v30.root import write_server

if TYPE_CHECKING:
    from .writers import OpenApiWriterBase


class Server(ObjectExtended):
    """
    The Server object, in 2.0 the url is written as host, basePath and schemes
    of the document.

    .. _Server Object: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#server-object
    """

    url: str = Field(...)
    description: Optional[str] = Field(default=None)

    def serialize_as_v3(self, writer: "OpenApiWriterBase") -> None:
        write_server(writer, self)

    def serialize_as_v2(self, writer: "OpenApiWriterBase") -> None:
        v20_root.write_server(writer, self)
