"""Text scanning primitives.

Provides the Cursor, its segmented SourceText, and the character
classification predicates scans are written against. Separate from
diagnostics so that error rendering never depends on scanning.

Python 3.13+.
"""

from .characters import is_any_of, is_newline, is_same_line_whitespace, is_whitespace
from .cursor import Cursor, SourceText

__all__ = [
    "Cursor",
    "SourceText",
    "is_any_of",
    "is_newline",
    "is_same_line_whitespace",
    "is_whitespace",
]
