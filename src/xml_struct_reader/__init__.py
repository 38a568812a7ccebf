"""XML Struct Reader.

Reads an XML document from a stream into nested dictionaries, lists and
strings. Annotations in a reserved namespace can adjust the resulting
structure: group children into lists, merge an element's text under a key,
rename an element's key, or splice in another document.

Progressive API Disclosure:
- Level 1: Simple functions - read(), read_string(), read_file()
- Level 2: Configured reader - DefaultXMLStructReader with ReaderOptions
- Level 3: Custom interpreters - InterpreterRegistry and reader subclasses
"""

__version__ = "0.1.0"
__author__ = "XML Struct Reader Team"

# Level 1: Simple functions
from .api import read, read_file, read_string

# Level 3: Interpreter extension points
from .interpretation import (
    STRUCT_NAMESPACE,
    WILDCARD,
    Context,
    InterpreterRegistry,
    InterpreterType,
)

# Level 2: Configured readers
from .reader import (
    DefaultXMLStructReader,
    DefaultXMLStructReaderFactory,
    XMLStructReader,
    XMLStructReaderFactory,
)
from .shared import (
    ConflictPolicy,
    DataNotReadyError,
    MalformedXMLError,
    NoInterpreterFoundError,
    ReaderOption,
    ReaderOptions,
    ReaderStateError,
    XMLStructReaderError,
)
from .stream import StreamDelegate

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Simple reading functions
    "read",
    "read_string",
    "read_file",

    # Level 2: Readers, factories and options
    "XMLStructReader",
    "DefaultXMLStructReader",
    "XMLStructReaderFactory",
    "DefaultXMLStructReaderFactory",
    "StreamDelegate",
    "ReaderOption",
    "ReaderOptions",
    "ConflictPolicy",

    # Level 3: Interpreter extension points
    "STRUCT_NAMESPACE",
    "WILDCARD",
    "Context",
    "InterpreterRegistry",
    "InterpreterType",

    # Errors
    "XMLStructReaderError",
    "ReaderStateError",
    "MalformedXMLError",
    "NoInterpreterFoundError",
    "DataNotReadyError",
]
