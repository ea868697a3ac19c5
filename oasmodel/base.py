from typing import Optional, Any, Dict, TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, model_validator

if TYPE_CHECKING:
    from .writers import OpenApiWriterBase


class ObjectBase(BaseModel):
    """
    The base class for all document model objects.
    """

    model_config = ConfigDict(arbitrary_types_allowed=False, extra="forbid", populate_by_name=True)


class ObjectExtended(ObjectBase):
    extensions: Dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="before")
    def validate_ObjectExtended_extensions(cls, values):
        """
        move x- prefixed keys into extensions

        https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#specification-extensions
        :param values:
        :return: values
        """
        if values is None:
            return None
        if not isinstance(values, dict):
            return values
        e = dict()
        rm = set()
        for k, v in values.items():
            if k.startswith("x-"):
                e[k[2:]] = v
                rm.add(k)
        if len(e):
            values = {k: v for k, v in values.items() if k not in rm}
            if "extensions" in values.keys():
                raise ValueError("extensions")
            values["extensions"] = e

        return values

    def write_extensions(self, writer: "OpenApiWriterBase") -> None:
        for k, v in self.extensions.items():
            writer.write_property_name(f"x-{k}")
            writer.write_any(v)
