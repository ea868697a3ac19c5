import io
from typing import Optional, TextIO, Union, TYPE_CHECKING

from .enums import OpenApiFormat, SpecVersion
from .writers import OpenApiJsonWriter, OpenApiWriterBase, OpenApiYamlWriter, WriterSettings

if TYPE_CHECKING:
    from .base import ObjectBase


def create_writer(
    stream: TextIO, format: OpenApiFormat, settings: Optional[WriterSettings] = None
) -> OpenApiWriterBase:
    if format == OpenApiFormat.json:
        return OpenApiJsonWriter(stream, settings)
    elif format == OpenApiFormat.yaml:
        return OpenApiYamlWriter(stream, settings)
    raise ValueError(format)


def serialize_as(element: "ObjectBase", writer: OpenApiWriterBase, version: SpecVersion) -> None:
    """write the element, references are written as pointers"""
    if version == SpecVersion.OpenApi3_0:
        element.serialize_as_v3(writer)
    elif version == SpecVersion.OpenApi2_0:
        element.serialize_as_v2(writer)
    else:
        raise ValueError(version)


def serialize(
    element: "ObjectBase",
    stream: TextIO,
    version: Union[SpecVersion, str],
    format: Union[OpenApiFormat, str],
    settings: Optional[WriterSettings] = None,
) -> None:
    writer = create_writer(stream, OpenApiFormat(format), settings)
    serialize_as(element, writer, SpecVersion(version))
    writer.flush()


def serialize_as_json(element: "ObjectBase", version: Union[SpecVersion, str], terse: bool = False) -> str:
    stream = io.StringIO()
    serialize(element, stream, version, OpenApiFormat.json, WriterSettings(terse=terse))
    return stream.getvalue()


def serialize_as_yaml(element: "ObjectBase", version: Union[SpecVersion, str], terse: bool = False) -> str:
    stream = io.StringIO()
    serialize(element, stream, version, OpenApiFormat.yaml, WriterSettings(terse=terse))
    return stream.getvalue()
