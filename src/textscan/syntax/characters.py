"""Character classification predicates for the cursor.

Every predicate takes a cursor character, which is one grapheme cluster
(CRLF included), or None at end of text. None never matches anything, so
predicates can be applied to Cursor.current without a prior EOF check.
"""

from collections.abc import Container

import regex

from textscan.constants import CRLF, NEWLINE_CHARACTERS

__all__ = [
    "is_any_of",
    "is_newline",
    "is_same_line_whitespace",
    "is_whitespace",
]

# Unicode White_Space property. Unlike str.isspace(), excludes the
# information separators U+001C..U+001F. The quantifier admits CRLF.
_WHITESPACE = regex.compile(r"\p{White_Space}+")


def is_newline(char: str | None) -> bool:
    """Check whether a character terminates a line.

    Recognizes LF, VT, FF, CR, NEL, LINE SEPARATOR, PARAGRAPH SEPARATOR
    and the CRLF pair.

    Example:
        >>> is_newline("\\n"), is_newline("\\r\\n"), is_newline(" ")
        (True, True, False)
    """
    return char is not None and (char in NEWLINE_CHARACTERS or char == CRLF)


def is_whitespace(char: str | None) -> bool:
    """Check whether a character is whitespace, line breaks included.

    Follows the Unicode White_Space property, so every space separator
    counts (NO-BREAK SPACE, EM SPACE, IDEOGRAPHIC SPACE, ...). A cluster
    that carries a combining mark is not whitespace.

    Example:
        >>> is_whitespace("\\u3000"), is_whitespace("\\x1f")
        (True, False)
    """
    return char is not None and _WHITESPACE.fullmatch(char) is not None


def is_same_line_whitespace(char: str | None) -> bool:
    """Check whether a character is whitespace that does not break the line.

    Example:
        >>> is_same_line_whitespace(" "), is_same_line_whitespace("\\t")
        (True, True)
        >>> is_same_line_whitespace("\\n")
        False
    """
    return is_whitespace(char) and not is_newline(char)


def is_any_of(char: str | None, charset: Container[str]) -> bool:
    """Check set membership. None is never a member."""
    return char is not None and char in charset
