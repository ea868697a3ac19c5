from typing import TYPE_CHECKING

from ..enums import SpecVersion

if TYPE_CHECKING:
    from ..schemas import Schema
    from ..writers import OpenApiWriterBase


def write_schema(writer: "OpenApiWriterBase", schema: "Schema") -> None:
    schema.render(writer, SpecVersion.OpenApi3_0)
