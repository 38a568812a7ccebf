"""Reader facade driving the expat tokenizer.

XMLStructReader owns one expat parser session and a StreamDelegate. A call
to ``read`` feeds the input line by line, then feeds an empty final chunk so
that problems at the very end of the document (such as an unterminated
entity reference) are still reported. The parser and any file the delegate
owns are released exactly once, whichever way the read ends.

States: idle -> parsing -> done | failed. A reader is single-use; create a
new one for every read.
"""

import time
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple
from xml.parsers import expat

from xml_struct_reader.interpretation.context import Context
from xml_struct_reader.interpretation.names import NAMESPACE_SEPARATOR
from xml_struct_reader.shared import (
    DiagnosticEntry,
    DiagnosticSeverity,
    InvalidArgumentError,
    MalformedXMLError,
    ReaderOptions,
    ReaderStateError,
    ReadMetrics,
    default_options,
    get_logger,
)
from xml_struct_reader.stream import StreamDelegate

MS_PER_SECOND = 1000


class XMLStructReader(ABC):
    """Abstract structured XML reader.

    Subclasses turn the tokenizer callbacks into data and expose it through
    ``get_data``. The option set is whitelisted against
    ``get_default_options``, which subclasses may extend.
    """

    def __init__(
        self,
        stream: Any,
        options: Optional[Dict[str, Any]] = None,
        context: Optional[Context] = None,
        correlation_id: Optional[str] = None,
        include_depth: int = 0,
    ) -> None:
        """Initialize reader.

        Args:
            stream: StreamDelegate, or a file-like object to wrap in one
            options: Option overrides; unknown keys are ignored
            context: Initial context; a fresh one is created when omitted
            correlation_id: Optional correlation ID for request tracking
            include_depth: Nesting level when reading an included document

        Raises:
            InvalidArgumentError: If stream or context is of the wrong kind
        """
        self._parser: Optional[Any] = None
        self._done = False

        if context is not None and not isinstance(context, Context):
            raise InvalidArgumentError("Context is not a valid object.")

        self.stream = stream if isinstance(stream, StreamDelegate) else StreamDelegate(stream)
        self.options = ReaderOptions(self.get_default_options(), options)
        self.context = context if context is not None else Context()
        self.correlation_id = correlation_id
        self.include_depth = include_depth
        self.logger = get_logger(__name__, correlation_id, "xml_struct_reader")
        self.metrics = ReadMetrics()
        self.diagnostics: List[DiagnosticEntry] = []

        self.set_up()

    def get_default_options(self) -> Dict[str, Any]:
        """Return the recognized option keys with their default values."""
        return default_options()

    def set_up(self) -> None:
        """Create the tokenizer session."""
        self._parser = self.create_parser()

    def create_parser(self) -> Any:
        """Create a namespace-aware expat parser wired to this reader."""
        parser = expat.ParserCreate(None, NAMESPACE_SEPARATOR)
        parser.ordered_attributes = True
        parser.buffer_text = True
        parser.StartElementHandler = self._handle_start_element
        parser.CharacterDataHandler = self.character_data
        parser.EndElementHandler = self.end_element
        return parser

    @property
    def is_done(self) -> bool:
        return self._done

    @property
    def has_session(self) -> bool:
        return self._parser is not None

    def _handle_start_element(self, name: str, attributes: List[str]) -> None:
        # ordered_attributes delivers [name1, value1, name2, value2, ...]
        pairs = list(zip(attributes[::2], attributes[1::2]))
        self.metrics.elements_read += 1
        self.metrics.attributes_read += len(pairs)
        self.start_element(name, pairs)

    @abstractmethod
    def start_element(self, name: str, attributes: List[Tuple[str, str]]) -> None:
        """Handle a start tag with its attributes in document order."""

    @abstractmethod
    def character_data(self, data: str) -> None:
        """Handle a run of character data."""

    @abstractmethod
    def end_element(self, name: str) -> None:
        """Handle an end tag."""

    @abstractmethod
    def get_data(self) -> Any:
        """Return the data produced by a completed read."""

    def read(self) -> Any:
        """Read the whole document and return its data.

        Returns:
            Data produced by ``get_data``

        Raises:
            ReaderStateError: If no tokenizer session exists
            MalformedXMLError: If the input is not well-formed XML
        """
        if self._parser is None:
            raise ReaderStateError("data could not be read")

        start_time = time.time()
        self.logger.info(
            "Starting read",
            extra={
                "source": self.stream.name,
                "include_depth": self.include_depth,
            }
        )

        try:
            while not self.stream.is_eof():
                line = self.stream.read_line()
                self.metrics.lines_read += 1
                self.metrics.characters_read += len(line)
                self.feed(line, False)
            self.feed(b"" if self.stream.is_binary else "", True)
            self._done = True
        finally:
            self.metrics.processing_time_ms = (time.time() - start_time) * MS_PER_SECOND
            self.close()

        self.logger.info("Read completed", extra=self.metrics.to_dict())
        return self.get_data()

    def feed(self, data: Any, is_final: bool) -> None:
        """Feed one chunk to the tokenizer.

        Raises:
            MalformedXMLError: If the tokenizer rejects the chunk
        """
        if self._parser is None:
            raise ReaderStateError("data could not be read")
        try:
            self._parser.Parse(data, is_final)
        except expat.ExpatError as e:
            self.logger.error(
                "Malformed XML",
                extra={"line": e.lineno, "column": e.offset, "code": e.code},
            )
            raise MalformedXMLError(
                expat.ErrorString(e.code), line=e.lineno, column=e.offset, code=e.code
            ) from e

    def close(self) -> None:
        """Release the tokenizer session and any owned file. Idempotent."""
        parser, self._parser = self._parser, None
        if parser is not None:
            parser.StartElementHandler = None
            parser.CharacterDataHandler = None
            parser.EndElementHandler = None
            self.logger.debug("Reader resources released")
        stream = getattr(self, "stream", None)
        if stream is not None:
            stream.close()

    def add_diagnostic(
        self,
        severity: DiagnosticSeverity,
        message: str,
        component: str,
        line: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Record a non-fatal diagnostic for this read."""
        self.diagnostics.append(
            DiagnosticEntry(
                severity=severity,
                message=message,
                component=component,
                line=line,
                details=details,
                correlation_id=self.correlation_id,
            )
        )

    def __enter__(self) -> "XMLStructReader":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def __del__(self) -> None:
        self.close()
