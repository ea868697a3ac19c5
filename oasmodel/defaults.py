"""
Default values for the Parameter/Header serialization attributes.

The effective values are computed at every call and never stored back on the
element, an unset ``style``/``explode`` remains unset.

https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#style-values
"""

from typing import Optional

from .enums import ParameterLocation, ParameterStyle


def default_style(location: Optional[ParameterLocation]) -> ParameterStyle:
    """the style implied by the location, ``None`` is the unspecified location"""
    if location in (ParameterLocation.query, ParameterLocation.cookie):
        return ParameterStyle.form
    return ParameterStyle.simple


def default_explode(style: ParameterStyle) -> bool:
    return style == ParameterStyle.form


def effective_style(location: Optional[ParameterLocation], declared: Optional[ParameterStyle]) -> ParameterStyle:
    if declared is not None:
        return declared
    return default_style(location)


def effective_explode(style: ParameterStyle, declared: Optional[bool]) -> bool:
    """
    :param style: the effective style, see :func:`effective_style`
    :param declared: the explode value of the element
    """
    if declared is not None:
        return declared
    return default_explode(style)
