from typing import Dict, List, Optional, TYPE_CHECKING

from pydantic import Field

from .base import ObjectExtended
from .enums import OperationType
from .general import Referenceable
from .media import MediaType
from .parameter import Header, Parameter
from .v20 import parameter as v20_parameter, paths as v20_paths
from .v30 import paths as v30_paths

if TYPE_CHECKING:
    from .writers import OpenApiWriterBase


class RequestBody(Referenceable):
    """
    A `RequestBody`_ object describes the body of a request.

    In 2.0 it is written as the body parameter of its Operation, the parameter
    name can be provided using the ``x-bodyName`` extension.

    .. _RequestBody: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#request-body-object
    """

    description: Optional[str] = Field(default=None)
    content: Dict[str, MediaType] = Field(default_factory=dict)
    required: bool = Field(default=False)

    def serialize_as_v3_without_reference(self, writer: "OpenApiWriterBase") -> None:
        v30_paths.write_request_body(writer, self)

    def serialize_as_v2_without_reference(self, writer: "OpenApiWriterBase") -> None:
        v20_parameter.write_body_parameter(writer, self)


class Response(Referenceable):
    """
    A `Response Object`_ describes a single response from an API Operation.

    .. _Response Object: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#response-object
    """

    description: str = Field(...)
    headers: Dict[str, Header] = Field(default_factory=dict)
    content: Dict[str, MediaType] = Field(default_factory=dict)

    def serialize_as_v3_without_reference(self, writer: "OpenApiWriterBase") -> None:
        v30_paths.write_response(writer, self)

    def serialize_as_v2_without_reference(self, writer: "OpenApiWriterBase") -> None:
        v20_paths.write_response(writer, self)


class Operation(ObjectExtended):
    """
    An Operation is a single API operation on a path.

    .. _Operation Object: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#operation-object
    """

    tags: List[str] = Field(default_factory=list)
    summary: Optional[str] = Field(default=None)
    description: Optional[str] = Field(default=None)
    operationId: Optional[str] = Field(default=None)
    parameters: List[Parameter] = Field(default_factory=list)
    requestBody: Optional[RequestBody] = Field(default=None)
    responses: Dict[str, Response] = Field(default_factory=dict)
    deprecated: bool = Field(default=False)

    def serialize_as_v3(self, writer: "OpenApiWriterBase") -> None:
        v30_paths.write_operation(writer, self)

    def serialize_as_v2(self, writer: "OpenApiWriterBase") -> None:
        v20_paths.write_operation(writer, self)


class PathItem(ObjectExtended):
    """
    A PathItem describes the operations available on a single path.

    .. _Path Item Object: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#path-item-object
    """

    summary: Optional[str] = Field(default=None)
    description: Optional[str] = Field(default=None)
    operations: Dict[OperationType, Operation] = Field(default_factory=dict)
    parameters: List[Parameter] = Field(default_factory=list)

    def serialize_as_v3(self, writer: "OpenApiWriterBase") -> None:
        v30_paths.write_path_item(writer, self)

    def serialize_as_v2(self, writer: "OpenApiWriterBase") -> None:
        v20_paths.write_path_item(writer, self)
