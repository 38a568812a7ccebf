"""Diagnostics and metrics recorded while reading.

Errors abort a read, so diagnostics only carry the non-fatal conditions a
reader meets along the way, such as includes that could not be resolved.
"""

import time
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Dict, Optional


class DiagnosticSeverity(Enum):
    """Severity levels for diagnostic entries."""

    DEBUG = auto()
    INFO = auto()
    WARNING = auto()    # Something was skipped but the read went on
    ERROR = auto()


@dataclass
class DiagnosticEntry:
    """Single diagnostic entry with context information."""

    severity: DiagnosticSeverity
    message: str
    component: str
    line: Optional[int] = None
    details: Optional[Dict[str, Any]] = None
    timestamp: float = field(default_factory=time.time)
    correlation_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate diagnostic entry."""
        if not self.message:
            raise ValueError("Diagnostic message cannot be empty")
        if not self.component:
            raise ValueError("Diagnostic component cannot be empty")


@dataclass
class ReadMetrics:
    """Counters collected during a single read."""

    processing_time_ms: float = 0.0
    lines_read: int = 0
    characters_read: int = 0
    elements_read: int = 0
    attributes_read: int = 0
    includes_resolved: int = 0
    includes_skipped: int = 0

    @property
    def characters_per_second(self) -> float:
        """Calculate characters read per second."""
        if self.processing_time_ms <= 0:
            return 0.0
        return (self.characters_read * 1000.0) / self.processing_time_ms

    @property
    def attributes_per_element(self) -> float:
        if self.elements_read == 0:
            return 0.0
        return self.attributes_read / self.elements_read

    def to_dict(self) -> Dict[str, Any]:
        return {
            "processing_time_ms": self.processing_time_ms,
            "lines_read": self.lines_read,
            "characters_read": self.characters_read,
            "elements_read": self.elements_read,
            "attributes_read": self.attributes_read,
            "includes_resolved": self.includes_resolved,
            "includes_skipped": self.includes_skipped,
        }
