"""
Structured diagnostics collected while parsing.

Malformed lines never abort a parse; instead each one is recorded here and the
log is returned on the ParseResult so callers can inspect, test, or ignore
warnings without depending on console output.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, Iterator, List, Optional


class DiagnosticLevel(Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Diagnostic:
    """
    A single diagnostic.

    Attributes:
        level: Severity.
        message: Human readable description.
        lineno: 1-based source line the diagnostic refers to, if any.
        raw: Original line text, if any.
    """

    level: DiagnosticLevel
    message: str
    lineno: Optional[int] = None
    raw: Optional[str] = None

    def to_dict(self) -> Dict[str, object]:
        return {
            "level": self.level.value,
            "message": self.message,
            "lineno": self.lineno,
            "raw": self.raw,
        }


@dataclass(frozen=True)
class DiagnosticStats:
    n_info: int
    n_warning: int
    n_error: int

    @property
    def total(self) -> int:
        return self.n_info + self.n_warning + self.n_error


@dataclass
class DiagnosticLog:
    """Ordered, append-only collection of diagnostics for one parse."""

    items: List[Diagnostic] = field(default_factory=list)

    @classmethod
    def from_iterable(cls, diagnostics: Iterable[Diagnostic]) -> "DiagnosticLog":
        return cls(items=list(diagnostics))

    def add(self, diagnostic: Diagnostic) -> None:
        self.items.append(diagnostic)

    def add_info(self, message: str, *, lineno: Optional[int] = None, raw: Optional[str] = None) -> None:
        self.add(Diagnostic(DiagnosticLevel.INFO, message, lineno, raw))

    def add_warning(self, message: str, *, lineno: Optional[int] = None, raw: Optional[str] = None) -> None:
        self.add(Diagnostic(DiagnosticLevel.WARNING, message, lineno, raw))

    def add_error(self, message: str, *, lineno: Optional[int] = None, raw: Optional[str] = None) -> None:
        self.add(Diagnostic(DiagnosticLevel.ERROR, message, lineno, raw))

    def stats(self) -> DiagnosticStats:
        counts = {level: 0 for level in DiagnosticLevel}
        for d in self.items:
            counts[d.level] += 1
        return DiagnosticStats(
            n_info=counts[DiagnosticLevel.INFO],
            n_warning=counts[DiagnosticLevel.WARNING],
            n_error=counts[DiagnosticLevel.ERROR],
        )

    def has_warning(self) -> bool:
        return any(d.level == DiagnosticLevel.WARNING for d in self.items)

    def has_error(self) -> bool:
        return any(d.level == DiagnosticLevel.ERROR for d in self.items)

    def to_dict(self) -> Dict[str, int]:
        """Counts by severity, e.g. ``{"info": 0, "warning": 2, "error": 0}``."""
        stats = self.stats()
        return {"info": stats.n_info, "warning": stats.n_warning, "error": stats.n_error}

    def to_list(self) -> List[Dict[str, object]]:
        return [d.to_dict() for d in self.items]

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
