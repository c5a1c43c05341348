"""Shared constants for textscan.

Single source of truth for the character classes the cursor and the
classification predicates agree on. Placing them here keeps syntax and
diagnostics free of circular imports.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Line endings
    "CRLF",
    "NEWLINE_CHARACTERS",
]

# ============================================================================
# LINE ENDINGS
# ============================================================================

# Carriage return + line feed. Segmented as ONE character by the cursor,
# so a Windows line ending is stepped over, counted and classified as a
# single line break.
CRLF: str = "\r\n"

# Single code points that terminate a line:
#   LF, VT, FF, CR, NEL (U+0085), LINE SEPARATOR, PARAGRAPH SEPARATOR.
# Matches the Unicode newline set. str.splitlines() also breaks on
# U+001C..U+001E; those are not line terminators here.
NEWLINE_CHARACTERS: frozenset[str] = frozenset("\n\x0b\x0c\r\x85\u2028\u2029")


