"""Exception hierarchy for structured XML reading.

Every failure raised by a reader derives from XMLStructReaderError, so callers
can catch the whole family at once or pick the specific condition they care
about. All of them abort the current read; there is no partial result.
"""

from typing import Optional


class XMLStructReaderError(Exception):
    """Base exception for all reader errors."""


class ReaderStateError(XMLStructReaderError):
    """Raised when a reader has no parser session to read with."""


class MalformedXMLError(XMLStructReaderError):
    """Raised when the underlying tokenizer rejects a chunk of input.

    Attributes:
        line: Line number reported by the tokenizer
        column: Column offset reported by the tokenizer
        code: Native tokenizer error code
    """

    def __init__(
        self,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
        code: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column
        self.code = code

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"{self.message} on line {self.line}"


class NoInterpreterFoundError(XMLStructReaderError, LookupError):
    """Raised when no registry entry matches a tag or attribute name."""

    kind = "interpreter"

    def __init__(self, namespace: Optional[str], name: str) -> None:
        self.namespace = namespace
        self.name = name
        qualified = f"{{{namespace}}}{name}" if namespace else name
        super().__init__(f"No {self.kind} found for '{qualified}'")


class ElementInterpreterNotFoundError(NoInterpreterFoundError):
    """No element interpreter is registered for a tag name."""

    kind = "element interpreter"


class AttributeInterpreterNotFoundError(NoInterpreterFoundError):
    """No attribute interpreter is registered for an attribute name."""

    kind = "attribute interpreter"


class DataNotReadyError(XMLStructReaderError):
    """Raised when data is requested before a read has completed."""


class InvalidArgumentError(XMLStructReaderError, ValueError):
    """Raised when a collaborator is constructed with an argument of the wrong kind."""


class IncludeDepthError(XMLStructReaderError):
    """Raised when nested includes exceed the configured maximum depth."""

    def __init__(self, depth: int, limit: int, path: str) -> None:
        self.depth = depth
        self.limit = limit
        self.path = path
        super().__init__(
            f"Include depth {depth} exceeds limit {limit} while including '{path}'"
        )
