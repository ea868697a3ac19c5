import enum
from typing import Optional


class SpecVersion(str, enum.Enum):
    """the wire dialects a document can be written as"""

    OpenApi2_0 = "2.0"
    OpenApi3_0 = "3.0"


class OpenApiFormat(str, enum.Enum):
    json = "json"
    yaml = "yaml"


class ParameterLocation(str, enum.Enum):
    query = "query"
    header = "header"
    path = "path"
    cookie = "cookie"


class ParameterStyle(str, enum.Enum):
    matrix = "matrix"
    label = "label"
    form = "form"
    simple = "simple"
    spaceDelimited = "spaceDelimited"
    pipeDelimited = "pipeDelimited"
    deepObject = "deepObject"


class OperationType(str, enum.Enum):
    get = "get"
    put = "put"
    post = "post"
    delete = "delete"
    options = "options"
    head = "head"
    patch = "patch"
    trace = "trace"


class ReferenceType(str, enum.Enum):
    """
    The kinds of components a Reference can point to.

    The value is the plural segment used below ``#/components/`` in 3.x documents.
    """

    schema = "schemas"
    response = "responses"
    parameter = "parameters"
    example = "examples"
    requestBody = "requestBodies"
    header = "headers"
    securityScheme = "securitySchemes"
    link = "links"
    callback = "callbacks"

    @property
    def v2_segment(self) -> Optional[str]:
        """the 2.0 root segment, None if 2.0 has no place for the kind"""
        return _V2_SEGMENTS.get(self)


_V2_SEGMENTS = {
    ReferenceType.schema: "definitions",
    ReferenceType.parameter: "parameters",
    ReferenceType.requestBody: "parameters",
    ReferenceType.response: "responses",
    ReferenceType.securityScheme: "securityDefinitions",
}
