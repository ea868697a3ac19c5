from typing import Any, Optional, TYPE_CHECKING

from pydantic import Field

from .general import Referenceable
from .v30.media import write_example

if TYPE_CHECKING:
    from .writers import OpenApiWriterBase


class Example(Referenceable):
    """
    An `Example Object`_ with a summary, a description and either an
    embedded value or the url of an external one.

    .. _Example Object: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#example-object
    """

    summary: Optional[str] = Field(default=None)
    description: Optional[str] = Field(default=None)
    value: Optional[Any] = Field(default=None)
    externalValue: Optional[str] = Field(default=None)

    def serialize_as_v3_without_reference(self, writer: "OpenApiWriterBase") -> None:
        write_example(writer, self)

    def serialize_as_v2_without_reference(self, writer: "OpenApiWriterBase") -> None:
        # 2.0 has no Example Object, the 3.0 form is kept
        write_example(writer, self)
