import abc
import datetime
import enum
import json
from typing import Any, Callable, Dict, Iterable, List, Optional, TextIO, TYPE_CHECKING

import yaml
from pydantic import BaseModel

from . import log
from .errors import WriterError

if TYPE_CHECKING:
    from .general import Reference


class ReferenceInline(str, enum.Enum):
    NEVER = "never"
    LOCAL = "local"
    ALL = "all"


class WriterSettings(BaseModel):
    """
    :param terse: compact output, no indentation or line breaks
    :param inline: write the local fields of referenced elements instead of the pointer
    """

    terse: bool = False
    inline: ReferenceInline = ReferenceInline.NEVER

    def should_inline(self, reference: "Reference") -> bool:
        if self.inline == ReferenceInline.ALL:
            return True
        if self.inline == ReferenceInline.LOCAL:
            return not reference.is_external
        return False


class _Scope:
    __slots__ = ("type", "count", "name")

    OBJECT = "object"
    ARRAY = "array"

    def __init__(self, type_: str):
        self.type = type_
        self.count = 0
        self.name: Optional[str] = None


class OpenApiWriterBase(abc.ABC):
    """
    Receives the events of a single document (or fragment) and renders them.

    The events are checked against the grammar value := scalar | object | array,
    object := start (name value)* end, array := start value* end.
    """

    def __init__(self, stream: TextIO, settings: Optional[WriterSettings] = None):
        log.init()
        self.stream = stream
        self.settings = settings or WriterSettings()
        self._scopes: List[_Scope] = []
        self._root = False

    @property
    def depth(self) -> int:
        return len(self._scopes)

    def _value_position(self) -> Optional[_Scope]:
        if not self._scopes:
            if self._root:
                raise WriterError("a document has a single root value")
            self._root = True
            return None
        scope = self._scopes[-1]
        if scope.type == _Scope.OBJECT:
            if scope.name is None:
                raise WriterError("a value inside an object requires a property name")
            scope.name = None
        else:
            scope.count += 1
        return scope

    def _close(self, type_: str) -> _Scope:
        if not self._scopes or self._scopes[-1].type != type_:
            raise WriterError(f"no open {type_} to end")
        scope = self._scopes.pop()
        if scope.name is not None:
            raise WriterError(f"property {scope.name} has no value")
        return scope

    def write_start_object(self) -> None:
        self._start_container(self._value_position(), _Scope.OBJECT)
        self._scopes.append(_Scope(_Scope.OBJECT))

    def write_end_object(self) -> None:
        scope = self._close(_Scope.OBJECT)
        self._end_container(scope)

    def write_start_array(self) -> None:
        self._start_container(self._value_position(), _Scope.ARRAY)
        self._scopes.append(_Scope(_Scope.ARRAY))

    def write_end_array(self) -> None:
        scope = self._close(_Scope.ARRAY)
        self._end_container(scope)

    def write_property_name(self, name: str) -> None:
        if not self._scopes or self._scopes[-1].type != _Scope.OBJECT:
            raise WriterError(f"property {name} outside of an object")
        scope = self._scopes[-1]
        if scope.name is not None:
            raise WriterError(f"property {scope.name} has no value")
        self._property_name(scope, name)
        scope.count += 1
        scope.name = name

    def write_value(self, value: Any) -> None:
        if isinstance(value, enum.Enum):
            value = value.value
        elif isinstance(value, (datetime.datetime, datetime.date)):
            value = value.isoformat()
        if value is not None and not isinstance(value, (str, bool, int, float)):
            raise WriterError(f"unsupported scalar type {type(value).__name__}")
        self._scalar(self._value_position(), value)

    def write_any(self, value: Any) -> None:
        """writes a JSON-like value, mappings and sequences keep their order"""
        if isinstance(value, dict):
            self.write_start_object()
            for k, v in value.items():
                self.write_property_name(str(k))
                self.write_any(v)
            self.write_end_object()
        elif isinstance(value, (list, tuple)):
            self.write_start_array()
            for v in value:
                self.write_any(v)
            self.write_end_array()
        else:
            self.write_value(value)

    def write_property(self, name: str, value: Any, default: Any = None) -> None:
        """write name and value, skipped if the value is None or equal to the default"""
        if value is None:
            return
        if default is not None and value == default:
            return
        self.write_property_name(name)
        self.write_any(value)

    def write_required_property(self, name: str, value: Any) -> None:
        self.write_property_name(name)
        self.write_any(value)

    def write_optional_object(
        self, name: str, value: Any, action: Callable[["OpenApiWriterBase", Any], None]
    ) -> None:
        if value is None:
            return
        self.write_property_name(name)
        action(self, value)

    def write_optional_map(
        self, name: str, values: Dict[str, Any], action: Callable[["OpenApiWriterBase", Any], None]
    ) -> None:
        if not values:
            return
        self.write_required_map(name, values, action)

    def write_required_map(
        self, name: str, values: Dict[str, Any], action: Callable[["OpenApiWriterBase", Any], None]
    ) -> None:
        self.write_property_name(name)
        self.write_start_object()
        for k, v in values.items():
            self.write_property_name(k)
            action(self, v)
        self.write_end_object()

    def write_optional_collection(
        self, name: str, values: Iterable[Any], action: Callable[["OpenApiWriterBase", Any], None]
    ) -> None:
        values = list(values or [])
        if not values:
            return
        self.write_property_name(name)
        self.write_start_array()
        for v in values:
            action(self, v)
        self.write_end_array()

    def flush(self) -> None:
        if (f := getattr(self.stream, "flush", None)) is not None:
            f()

    @abc.abstractmethod
    def _start_container(self, parent: Optional[_Scope], type_: str) -> None: ...

    @abc.abstractmethod
    def _end_container(self, scope: _Scope) -> None: ...

    @abc.abstractmethod
    def _property_name(self, scope: _Scope, name: str) -> None: ...

    @abc.abstractmethod
    def _scalar(self, parent: Optional[_Scope], value: Any) -> None: ...


class OpenApiJsonWriter(OpenApiWriterBase):
    INDENT = "  "

    def _newline(self, depth: int) -> None:
        if not self.settings.terse:
            self.stream.write("\n" + self.INDENT * depth)

    def _array_item(self, parent: Optional[_Scope]) -> None:
        if parent is None or parent.type != _Scope.ARRAY:
            return
        if parent.count > 1:
            self.stream.write(",")
        self._newline(self.depth)

    def _start_container(self, parent, type_):
        self._array_item(parent)
        self.stream.write("{" if type_ == _Scope.OBJECT else "[")

    def _end_container(self, scope):
        if scope.count:
            self._newline(self.depth)
        self.stream.write("}" if scope.type == _Scope.OBJECT else "]")

    def _property_name(self, scope, name):
        if scope.count:
            self.stream.write(",")
        self._newline(self.depth)
        self.stream.write(json.dumps(name, ensure_ascii=False))
        self.stream.write(":" if self.settings.terse else ": ")

    def _scalar(self, parent, value):
        self._array_item(parent)
        self.stream.write(json.dumps(value, ensure_ascii=False))


class OpenApiYamlWriter(OpenApiWriterBase):
    """
    Collects the events as a yaml node graph, the document is serialized
    once the root value is complete.

    Mappings are lists of (key, value) node pairs, keys are neither sorted
    nor merged.
    """

    def __init__(self, stream: TextIO, settings: Optional[WriterSettings] = None):
        super().__init__(stream, settings)
        self._representer = yaml.representer.SafeRepresenter()
        self._nodes: List[yaml.Node] = []
        self._keys: List[Optional[yaml.ScalarNode]] = []

    def _attach(self, node: yaml.Node) -> None:
        if not self._nodes:
            self._emit(node)
            return
        parent = self._nodes[-1]
        if isinstance(parent, yaml.MappingNode):
            parent.value.append((self._keys[-1], node))
            self._keys[-1] = None
        else:
            parent.value.append(node)

    def _emit(self, node: yaml.Node) -> None:
        yaml.serialize(
            node,
            self.stream,
            Dumper=yaml.SafeDumper,
            indent=2,
            width=float("inf"),
            allow_unicode=True,
        )

    def _start_container(self, parent, type_):
        flow_style = self.settings.terse
        if type_ == _Scope.OBJECT:
            node = yaml.MappingNode("tag:yaml.org,2002:map", [], flow_style=flow_style)
        else:
            node = yaml.SequenceNode("tag:yaml.org,2002:seq", [], flow_style=flow_style)
        self._nodes.append(node)
        self._keys.append(None)

    def _end_container(self, scope):
        node = self._nodes.pop()
        self._keys.pop()
        self._attach(node)

    def _property_name(self, scope, name):
        self._keys[-1] = yaml.ScalarNode("tag:yaml.org,2002:str", name)

    def _scalar(self, parent, value):
        self._attach(self._representer.represent_data(value))
