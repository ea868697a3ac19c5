import io
import json

import pytest
import yaml

from oasmodel import (
    Example,
    OpenApiJsonWriter,
    OpenApiYamlWriter,
    Parameter,
    ParameterLocation,
    ParameterStyle,
    Reference,
    ReferenceType,
    Schema,
    SpecVersion,
    WriterSettings,
)


@pytest.fixture
def basic_parameter():
    return Parameter(name="name1", in_=ParameterLocation.path)


@pytest.fixture
def referenced_parameter():
    return Parameter(
        name="name1",
        in_=ParameterLocation.path,
        reference=Reference(type=ReferenceType.parameter, id="example1"),
    )


@pytest.fixture
def advanced_path_parameter():
    return Parameter(
        name="name1",
        in_=ParameterLocation.path,
        description="description1",
        required=True,
        deprecated=False,
        style=ParameterStyle.simple,
        explode=True,
        schema=Schema(
            title="title2",
            description="description2",
            oneOf=[Schema(type="number", format="double"), Schema(type="string")],
        ),
        examples={"test": Example(summary="summary3", description="description3")},
    )


def _form_parameter(explode):
    return Parameter(
        name="name1",
        in_=ParameterLocation.query,
        description="description1",
        style=ParameterStyle.form,
        explode=explode,
        schema=Schema(type="array", items=Schema(enum=["value1", "value2"])),
    )


@pytest.fixture
def form_parameter_explode_false():
    return _form_parameter(False)


@pytest.fixture
def form_parameter_explode_true():
    return _form_parameter(True)


@pytest.fixture
def query_parameter_missing_style():
    return Parameter(
        name="id",
        in_=ParameterLocation.query,
        schema=Schema(type="object", additionalProperties=Schema(type="integer")),
    )


def _header_parameter(schema):
    return Parameter(
        name="name1",
        in_=ParameterLocation.header,
        description="description1",
        required=True,
        deprecated=False,
        style=ParameterStyle.simple,
        explode=True,
        schema=schema,
        examples={"test": Example(summary="summary3", description="description3")},
    )


@pytest.fixture
def header_parameter_with_schema_reference():
    return _header_parameter(Schema(ref="schemaObject1"))


@pytest.fixture
def header_parameter_with_schema_type_object():
    return _header_parameter(Schema(type="object"))


@pytest.fixture(params=[True, False], ids=["terse", "indented"])
def terse(request):
    return request.param


@pytest.fixture(params=[SpecVersion.OpenApi2_0, SpecVersion.OpenApi3_0], ids=["v2", "v3"])
def spec_version(request):
    return request.param


class Output:
    """collects what an element writes, parsed back for comparison"""

    def __init__(self, writer_class, terse=False, **kwargs):
        self.stream = io.StringIO()
        self.writer = writer_class(self.stream, WriterSettings(terse=terse, **kwargs))

    @property
    def text(self):
        self.writer.flush()
        return self.stream.getvalue()

    def load(self):
        if isinstance(self.writer, OpenApiJsonWriter):
            return json.loads(self.text)
        return yaml.safe_load(self.text)


@pytest.fixture
def json_output(terse):
    return Output(OpenApiJsonWriter, terse)


@pytest.fixture
def yaml_output():
    return Output(OpenApiYamlWriter)


@pytest.fixture
def output_factory():
    return Output
