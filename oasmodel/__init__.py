from .enums import SpecVersion, OpenApiFormat, ParameterLocation, ParameterStyle, OperationType, ReferenceType
from .errors import ErrorBase, SpecError, MalformedEntityError, ReferenceResolutionError, WriterError
from .general import Reference
from .schemas import Schema, SchemaShape
from .example import Example
from .media import MediaType
from .parameter import Parameter, Header
from .paths import RequestBody, Response, Operation, PathItem
from .components import Components
from .info import Info
from .servers import Server
from .root import Document
from .writers import OpenApiJsonWriter, OpenApiYamlWriter, WriterSettings, ReferenceInline
from .serialize import serialize, serialize_as, serialize_as_json, serialize_as_yaml

__all__ = [
    "SpecVersion",
    "OpenApiFormat",
    "ParameterLocation",
    "ParameterStyle",
    "OperationType",
    "ReferenceType",
    "ErrorBase",
    "SpecError",
    "MalformedEntityError",
    "ReferenceResolutionError",
    "WriterError",
    "Reference",
    "Schema",
    "SchemaShape",
    "Example",
    "MediaType",
    "Parameter",
    "Header",
    "RequestBody",
    "Response",
    "Operation",
    "PathItem",
    "Components",
    "Info",
    "Server",
    "Document",
    "OpenApiJsonWriter",
    "OpenApiYamlWriter",
    "WriterSettings",
    "ReferenceInline",
    "serialize",
    "serialize_as",
    "serialize_as_json",
    "serialize_as_yaml",
]
