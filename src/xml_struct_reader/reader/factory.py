"""Reader factories.

A factory creates readers from paths or file objects. When it has an owner
(the reader that is including another document) the new reader inherits the
owner's options, correlation ID and include depth.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Type

from xml_struct_reader.interpretation.context import Context
from xml_struct_reader.reader.base import XMLStructReader
from xml_struct_reader.reader.default import DefaultXMLStructReader
from xml_struct_reader.shared.errors import InvalidArgumentError
from xml_struct_reader.stream import StreamDelegate


class XMLStructReaderFactory(ABC):
    """Base factory for readers."""

    def __init__(
        self,
        owner: Optional[XMLStructReader] = None,
        context: Optional[Context] = None,
        correlation_id: Optional[str] = None,
    ) -> None:
        """Initialize factory.

        Args:
            owner: Reader on whose behalf readers are created
            context: Initial context handed to created readers
            correlation_id: Correlation ID used when there is no owner

        Raises:
            InvalidArgumentError: If owner or context is of the wrong kind
        """
        if owner is not None and not isinstance(owner, XMLStructReader):
            raise InvalidArgumentError("Owner is not a valid object.")
        if context is not None and not isinstance(context, Context):
            raise InvalidArgumentError("Context is not a valid object.")

        self.owner = owner
        self.context = context
        self.correlation_id = correlation_id

    def create_delegate(self, source: Any) -> StreamDelegate:
        """Wrap a path or file object in a StreamDelegate."""
        if isinstance(source, StreamDelegate):
            return source
        if isinstance(source, (str, Path)):
            return StreamDelegate.open(source)
        return StreamDelegate(source)

    def create_reader(
        self, source: Any, options: Optional[Mapping[str, Any]] = None
    ) -> XMLStructReader:
        """Create a reader for a path or file object.

        Args:
            source: Path, file-like object or StreamDelegate
            options: Option overrides; defaults to the owner's options

        Raises:
            OSError: If a path cannot be opened
        """
        delegate = self.create_delegate(source)

        if options is None and self.owner is not None:
            options = self.owner.options

        context = self.context
        if context is None and self.owner is not None:
            context = self.owner.context.clone()

        try:
            return self.create_reader_object(delegate, options, context)
        except Exception:
            delegate.close()
            raise

    def reader_settings(self) -> Dict[str, Any]:
        """Keyword arguments inherited from the owner."""
        if self.owner is None:
            return {"correlation_id": self.correlation_id, "include_depth": 0}
        return {
            "correlation_id": self.owner.correlation_id,
            "include_depth": self.owner.include_depth + 1,
        }

    @abstractmethod
    def create_reader_object(
        self,
        delegate: StreamDelegate,
        options: Optional[Mapping[str, Any]] = None,
        context: Optional[Context] = None,
    ) -> XMLStructReader:
        """Instantiate the concrete reader."""


class DefaultXMLStructReaderFactory(XMLStructReaderFactory):
    """Factory producing DefaultXMLStructReader instances."""

    reader_class: Type[XMLStructReader] = DefaultXMLStructReader

    def create_reader_object(
        self,
        delegate: StreamDelegate,
        options: Optional[Mapping[str, Any]] = None,
        context: Optional[Context] = None,
    ) -> XMLStructReader:
        return self.reader_class(delegate, options, context, **self.reader_settings())
