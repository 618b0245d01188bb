"""Diagnostics - Optional warnings collected while parsing.

The parser never rejects input. Problems it works around are reported
here when the caller asks for them, and the element output is the same
whether or not a collector is supplied.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum


class WarningKind(Enum):
    """Kinds of problems the parser works around."""

    NON_NUMERIC_EDGE_LABEL = "non-numeric-edge-label"
    ORPHAN_INDENT = "orphan-indent"
    UNRESOLVED_TARGET = "unresolved-target"
    DROPPED_LINK = "dropped-link"
    DUPLICATE_LABEL = "duplicate-label"


@dataclass(frozen=True)
class ParseWarning:
    """A single problem found on one line.

    Attributes:
        line_number: Line number including the caller's offset.
        kind: What went wrong.
        message: Human-readable description.
    """

    line_number: int
    kind: WarningKind
    message: str

    def __str__(self) -> str:
        """Human-readable representation."""
        return f"line {self.line_number}: [{self.kind.value}] {self.message}"


@dataclass
class Diagnostics:
    """Collector for parse warnings, in the order they were found."""

    _warnings: list[ParseWarning] = field(default_factory=list)

    def add(self, line_number: int, kind: WarningKind, message: str) -> ParseWarning:
        """Record a warning and return it."""
        warning = ParseWarning(line_number, kind, message)
        self._warnings.append(warning)
        return warning

    def __iter__(self) -> Iterator[ParseWarning]:
        yield from self._warnings

    def __len__(self) -> int:
        return len(self._warnings)

    def by_kind(self, kind: WarningKind) -> list[ParseWarning]:
        """Return warnings of one kind."""
        return [w for w in self._warnings if w.kind == kind]

    def clear(self) -> None:
        """Drop all collected warnings."""
        self._warnings.clear()
