import dataclasses
from typing import Any, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .general import Reference


class ErrorBase(Exception):
    pass


class SpecError(ErrorBase, ValueError):
    """
    This error class is used when an invalid element is found while
    serializing an object of the document model.
    """

    def __init__(self, message, element=None):
        self.message = message
        self.element = element

    def __str__(self):
        return self.message


@dataclasses.dataclass(repr=False)
class MalformedEntityError(SpecError):
    """
    The local state of an element can not be written in any dialect
    """

    element: Any
    message: str

    def __str__(self):
        return f"<{self.__class__.__name__} {type(self.element).__name__}: {self.message}>"


class ReferenceResolutionError(SpecError):
    """
    This error class is used when looking up a reference in the component
    registry fails.
    """

    def __init__(self, message, element: Optional["Reference"] = None):
        super().__init__(message, element)


class WriterError(ErrorBase):
    """
    The event sequence handed to a writer is not well formed
    """

    pass
