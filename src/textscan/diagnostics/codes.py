"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    The cursor has exactly one failure kind, so there is exactly one code.
    The numeric range leaves room for higher layers that reuse the
    diagnostic machinery:
        3000-3999: Scan errors (cursor failures)
    """

    SCAN_FAILED = 3001


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source code location for error reporting.

    Note:
        Offsets are Python string offsets (code points), not cursor
        positions. A CRLF pair or a base letter with a combining mark
        spans two offsets here but is one cursor character.

    Attributes:
        start: Starting string offset (0-indexed)
        end: Ending string offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Reject spans that cannot come from a cursor position.

        Raises:
            ValueError: If the offsets are not 0 <= start <= end, or the
                line or column is not 1-indexed.
        """
        if not 0 <= self.start <= self.end:
            msg = f"SourceSpan requires 0 <= start <= end, got {self.start}..{self.end}"
            raise ValueError(msg)
        if min(self.line, self.column) < 1:
            msg = f"SourceSpan line and column are 1-indexed, got {self.line}:{self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Message and location of a scan failure.

    Every scan failure has the same code. The message describes what the
    read expected, for people; callers recover through a saved position.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (None when the failure has no position)
        hint: Suggestion for fixing the error
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Render the diagnostic in Rust compiler style.

        Example output:
            error[SCAN_FAILED]: Expected 'x', found 'y'
              --> line 1, column 3
              = help: Save the cursor position before a tentative read
        """
        parts = [f"error[{self.code.name}]: {self.message}"]
        if self.span is not None:
            parts.append(f"  --> line {self.span.line}, column {self.span.column}")
        if self.hint:
            parts.append(f"  = help: {self.hint}")
        return "\n".join(parts)
