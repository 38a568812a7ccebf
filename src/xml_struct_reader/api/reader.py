"""Convenience functions for structured XML reading.

These are the simplest entry points: hand over a string, bytes, a path or
an open file and get the structured value back. Errors raised by the reader
propagate unchanged.
"""

import io
from pathlib import Path
from typing import Any, BinaryIO, Mapping, Optional, TextIO, Union

from xml_struct_reader.interpretation import ParsedValue
from xml_struct_reader.reader import DefaultXMLStructReaderFactory
from xml_struct_reader.shared import InvalidArgumentError, get_logger

# Type definitions for input data
InputType = Union[str, bytes, BinaryIO, TextIO, Path]

PREVIEW_LENGTH = 100  # Max length for content preview in logs


def read(
    source: InputType,
    options: Optional[Mapping[str, Any]] = None,
    correlation_id: Optional[str] = None,
) -> ParsedValue:
    """Read XML from any supported source with automatic type detection.

    A ``str`` starting with ``<`` (after leading whitespace) is treated as
    XML content, any other ``str`` as a path.

    Args:
        source: XML content, a path, or a file-like object
        options: Reader options
        correlation_id: Optional correlation ID for request tracking

    Returns:
        The document as nested dictionaries, lists and strings

    Examples:
        >>> read('<root><item>value</item></root>')
        {'root': {'item': 'value'}}
        >>> read(b'<element>value</element>')
        {'element': 'value'}
    """
    logger = get_logger(__name__, correlation_id, "read")
    logger.debug(
        "Starting universal read operation",
        extra={"input_type": type(source).__name__}
    )

    if isinstance(source, Path):
        return read_file(source, options, correlation_id)
    if isinstance(source, str):
        if source.lstrip().startswith("<"):
            return read_string(source, options, correlation_id)
        return read_file(source, options, correlation_id)
    if isinstance(source, (bytes, bytearray)):
        return _read_stream(io.BytesIO(bytes(source)), options, correlation_id)
    if hasattr(source, "readline"):
        return _read_stream(source, options, correlation_id)

    raise InvalidArgumentError(f"Unable to read input of type {type(source).__name__}")


def read_string(
    xml_string: str,
    options: Optional[Mapping[str, Any]] = None,
    correlation_id: Optional[str] = None,
) -> ParsedValue:
    """Read XML from a string.

    Examples:
        >>> read_string('<root test="value"/>')
        {'root': {'test': 'value'}}
    """
    logger = get_logger(__name__, correlation_id, "read_string")
    logger.debug(
        "Starting string read operation",
        extra={
            "content_length": len(xml_string),
            "preview": (
                xml_string[:PREVIEW_LENGTH] + "..."
                if len(xml_string) > PREVIEW_LENGTH else xml_string
            )
        }
    )
    return _read_stream(io.StringIO(xml_string), options, correlation_id)


def read_file(
    file_path: Union[str, Path],
    options: Optional[Mapping[str, Any]] = None,
    correlation_id: Optional[str] = None,
) -> ParsedValue:
    """Read XML from a file.

    Raises:
        OSError: If the file cannot be opened
    """
    path_obj = Path(file_path) if isinstance(file_path, str) else file_path
    logger = get_logger(__name__, correlation_id, "read_file")
    logger.debug("Starting file read operation", extra={"file_path": str(path_obj)})

    factory = DefaultXMLStructReaderFactory(correlation_id=correlation_id)
    with factory.create_reader(path_obj, options) as reader:
        return reader.read()


def _read_stream(
    stream: Any,
    options: Optional[Mapping[str, Any]],
    correlation_id: Optional[str],
) -> ParsedValue:
    factory = DefaultXMLStructReaderFactory(correlation_id=correlation_id)
    with factory.create_reader(stream, options) as reader:
        return reader.read()
