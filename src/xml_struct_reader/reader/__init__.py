"""Reader layer for structured XML reading.

Key Components:
    XMLStructReader: Abstract facade owning the tokenizer session
    DefaultXMLStructReader: Interpreter-driven reader producing nested data
    XMLStructReaderFactory: Creates readers from paths or file objects
    DefaultXMLStructReaderFactory: Factory for DefaultXMLStructReader
"""

from .base import XMLStructReader
from .default import DefaultXMLStructReader
from .factory import DefaultXMLStructReaderFactory, XMLStructReaderFactory

__all__ = [
    "XMLStructReader",
    "DefaultXMLStructReader",
    "XMLStructReaderFactory",
    "DefaultXMLStructReaderFactory",
]
