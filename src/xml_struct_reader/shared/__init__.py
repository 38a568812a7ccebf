"""Shared utilities for structured XML reading.

This module provides the option set, error hierarchy, diagnostics and logging
helpers used across the stream, interpretation and reader layers.
"""

from .config import (
    ConfigError,
    ConfigValidationError,
    ConflictPolicy,
    ReaderOption,
    ReaderOptions,
    default_options,
)
from .errors import (
    AttributeInterpreterNotFoundError,
    DataNotReadyError,
    ElementInterpreterNotFoundError,
    IncludeDepthError,
    InvalidArgumentError,
    MalformedXMLError,
    NoInterpreterFoundError,
    ReaderStateError,
    XMLStructReaderError,
)
from .logging import (
    CorrelationLogger,
    get_logger,
)
from .result import (
    DiagnosticEntry,
    DiagnosticSeverity,
    ReadMetrics,
)

__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "ConflictPolicy",
    "ReaderOption",
    "ReaderOptions",
    "default_options",
    "AttributeInterpreterNotFoundError",
    "DataNotReadyError",
    "ElementInterpreterNotFoundError",
    "IncludeDepthError",
    "InvalidArgumentError",
    "MalformedXMLError",
    "NoInterpreterFoundError",
    "ReaderStateError",
    "XMLStructReaderError",
    "CorrelationLogger",
    "get_logger",
    "DiagnosticEntry",
    "DiagnosticSeverity",
    "ReadMetrics",
]
