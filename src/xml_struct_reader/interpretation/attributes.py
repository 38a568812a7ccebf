"""Attribute interpreters.

Attributes are processed in document order right after their element's
interpreter is created, before any child element is parsed. An attribute
interpreter either adds data to the element, writes a directive into the
element's context, or discards the value.
"""

import weakref
from abc import ABC, abstractmethod
from typing import Any, Dict

from xml_struct_reader.interpretation.elements import ElementInterpreter

# Literal directive values kept for compatibility with existing documents
STRUCT_VALUES: Dict[str, Any] = {
    "php:null": None,
    "php:true": True,
    "php:false": False,
}


def decode_struct_value(value: str) -> Any:
    """Decode a directive attribute value.

    Examples:
        >>> decode_struct_value("php:true")
        True
        >>> decode_struct_value("item")
        'item'
    """
    if value in STRUCT_VALUES:
        return STRUCT_VALUES[value]
    return value


class AttributeInterpreter(ABC):
    """Base class for attribute interpreters."""

    def __init__(self, name: str, reader: Any) -> None:
        """Initialize interpreter.

        Args:
            name: Local attribute name
            reader: Reader driving the parse
        """
        self.name = name
        self._reader = weakref.ref(reader)

    @property
    def reader(self) -> Any:
        return self._reader()

    @abstractmethod
    def process(self, element: ElementInterpreter, value: str) -> None:
        """Consume the attribute value for the owning element."""


class DefaultAttribute(AttributeInterpreter):
    """Adds the attribute to the element's data under its local name."""

    def process(self, element: ElementInterpreter, value: str) -> None:
        element.add_attribute_data(self.name, value)


class StructAttribute(AttributeInterpreter):
    """Writes a directive into the element's context instead of its data."""

    def process(self, element: ElementInterpreter, value: str) -> None:
        element.context[self.name] = decode_struct_value(value)


class EmptyAttribute(AttributeInterpreter):
    """Discards the attribute."""

    def process(self, element: ElementInterpreter, value: str) -> None:
        return None
