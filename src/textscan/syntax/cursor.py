"""Mutable scanning cursor over an immutable source text.

A Cursor walks a string one character at a time. Every read either
succeeds and advances, or raises ScanError. Backtracking is the caller's
job: save `cursor.pos` (or use `cursor.attempt()`) before a tentative
sequence of reads and restore it when one of them fails.

Python 3.13+. Depends on: regex (grapheme cluster segmentation).

Character Model:
    - One character is one extended grapheme cluster: a base code point
      with its combining marks, a flag pair or a ZWJ emoji sequence is a
      single position.
    - CRLF (\\r\\n) is one cluster, so stepping, counting and newline
      classification treat a Windows line ending as a single line break.
    - Positions are character indices in [0, end_pos]; end_pos is one
      past the last character. Text is segmented once, when the
      SourceText is built, and shared by every copy of a cursor.

Line Numbers:
    \\n is the line delimiter (LF and CRLF). Lines ending in a lone CR are
    not counted.

Failure Positions:
    Reads leave the position unchanged on failure, with one exception:
    read_until(required=True) leaves the cursor where scanning stopped.
"""

import bisect
import logging
from collections.abc import Callable, Container, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, replace

import regex

from textscan.diagnostics import Diagnostic, ErrorTemplate, ScanError, SourceSpan

from .characters import is_newline, is_same_line_whitespace, is_whitespace

__all__ = ["Cursor", "SourceText"]

logger = logging.getLogger(__name__)

# Extended grapheme cluster (UAX #29). Groups CRLF, combining sequences,
# regional indicator pairs and ZWJ emoji sequences.
_GRAPHEME_CLUSTER = regex.compile(r"\X")


@dataclass(frozen=True, slots=True)
class SourceText:
    """Immutable, character-segmented source text.

    Attributes:
        source: The scanned string
        characters: One entry per cursor character
        offsets: String offset of each character, plus len(source) at the end
        line_starts: Character position where each line starts

    Thread Safety:
        Immutable. Safe to share across threads and cursor copies.

    Example:
        >>> text = SourceText.from_string("a\\r\\nb")
        >>> text.characters
        ('a', '\\r\\n', 'b')
        >>> text.offsets
        (0, 1, 3, 4)
    """

    source: str
    characters: tuple[str, ...]
    offsets: tuple[int, ...]
    line_starts: tuple[int, ...]

    @classmethod
    def from_string(cls, source: str) -> "SourceText":
        """Segment a string into cursor characters in one pass.

        Args:
            source: Text to scan

        Returns:
            SourceText sharing `source`

        Raises:
            TypeError: If source is not a str
        """
        if not isinstance(source, str):
            msg = f"Source must be str, got {type(source).__name__}"
            raise TypeError(msg)

        characters: list[str] = []
        offsets: list[int] = []
        line_starts = [0]
        for match in _GRAPHEME_CLUSTER.finditer(source):
            cluster = match.group()
            offsets.append(match.start())
            characters.append(cluster)
            if cluster[-1] == "\n":
                line_starts.append(len(characters))
        offsets.append(len(source))

        return cls(
            source=source,
            characters=tuple(characters),
            offsets=tuple(offsets),
            line_starts=tuple(line_starts),
        )

    def __len__(self) -> int:
        return len(self.characters)

    def slice(self, start: int, end: int) -> str:
        """Substring between two character positions (clamped, never raises)."""
        start = self.clamp(start)
        end = self.clamp(end)
        return self.source[self.offsets[start] : self.offsets[end]]

    def clamp(self, pos: int) -> int:
        """Clamp a character position into [0, len(self)]."""
        return min(max(pos, 0), len(self.characters))

    def line_col(self, pos: int) -> tuple[int, int]:
        """Compute 1-based (line, column) for a character position.

        Complexity:
            O(log n) binary search over line starts.

        Example:
            >>> SourceText.from_string("ab\\ncd").line_col(4)
            (2, 2)
        """
        pos = self.clamp(pos)
        line_index = bisect.bisect_right(self.line_starts, pos) - 1
        return (line_index + 1, pos - self.line_starts[line_index] + 1)

    def line_content(self, line: int) -> str:
        """Content of a 1-based line without its line ending.

        Raises:
            ValueError: If line is out of range
        """
        if not 1 <= line <= len(self.line_starts):
            msg = f"Line {line} out of range (source has {len(self.line_starts)} lines)"
            raise ValueError(msg)
        start = self.line_starts[line - 1]
        end = (
            self.line_starts[line] - 1 if line < len(self.line_starts) else len(self.characters)
        )
        return self.slice(start, end)


class Cursor:
    """Mutable position tracker over a shared SourceText.

    A cursor is a value: it owns its position and shares nothing mutable.
    `copy()` produces an independent cursor over the same text, which is
    how parallel or speculative scans are done.

    Example:
        >>> cursor = Cursor("hello")
        >>> cursor.current
        'h'
        >>> cursor.read("h")
        >>> cursor.read_until("l")
        'e'
        >>> cursor.pos
        3
        >>> cursor.advance(10)
        >>> cursor.is_eof, cursor.current
        (True, None)
    """

    __slots__ = ("_pos", "_text")

    def __init__(self, source: str | SourceText, pos: int = 0) -> None:
        """Create a cursor.

        Args:
            source: Text to scan, as a str or an already segmented SourceText
            pos: Initial character position, clamped into range
        """
        self._text = source if isinstance(source, SourceText) else SourceText.from_string(source)
        self._pos = self._text.clamp(pos)

    def __repr__(self) -> str:
        return f"Cursor(pos={self._pos}, end_pos={self.end_pos}, current={self.current!r})"

    def __copy__(self) -> "Cursor":
        return Cursor(self._text, self._pos)

    def copy(self) -> "Cursor":
        """Return an independent cursor at the same position over the same text."""
        return self.__copy__()

    # ------------------------------------------------------------------
    # State and accessors
    # ------------------------------------------------------------------

    @property
    def text(self) -> SourceText:
        return self._text

    @property
    def source(self) -> str:
        return self._text.source

    @property
    def pos(self) -> int:
        """Current character position, always within [0, end_pos]."""
        return self._pos

    @property
    def end_pos(self) -> int:
        """One past the last character."""
        return len(self._text.characters)

    @property
    def offset(self) -> int:
        """String offset of the current position in `source`."""
        return self._text.offsets[self._pos]

    @property
    def is_eof(self) -> bool:
        """Check if at end of input.

        Note: This is the preferred way to check for EOF.
              Use this in while loops: `while not cursor.is_eof:`
        """
        return self._pos >= len(self._text.characters)

    @property
    def current(self) -> str | None:
        """Character at the current position, or None at end of text.

        None cannot be confused with a real character (a NUL in the input
        is returned as "\\x00"), and every predicate in
        textscan.syntax.characters returns False for it, so
        `is_newline(cursor.current)` needs no EOF check.
        """
        return self.peek(0)

    @property
    def previous(self) -> str | None:
        """Character before the current position, or None at the start."""
        return self.peek(-1)

    @property
    def next(self) -> str | None:
        """Character after the current one, or None if fewer than two remain."""
        return self.peek(1)

    def peek(self, offset: int = 0) -> str | None:
        """Peek at a character relative to the current position.

        Args:
            offset: Offset from current position (0 = current, 1 = next,
                -1 = previous)

        Returns:
            Character at position + offset, or None outside the text
        """
        target = self._pos + offset
        if 0 <= target < len(self._text.characters):
            return self._text.characters[target]
        return None

    def characters(self, start: int, end: int) -> str:
        """Substring between two character positions of this text.

        Caller supplies ordered positions, typically a saved `pos` and the
        current one. Out-of-range positions are clamped.
        """
        return self._text.slice(start, end)

    def compute_line_col(self) -> tuple[int, int]:
        """Compute 1-based (line, column) of the current position.

        Example:
            >>> cursor = Cursor("line1\\nline2")
            >>> cursor.move_to(8)
            >>> cursor.compute_line_col()
            (2, 3)
        """
        return self._text.line_col(self._pos)

    # ------------------------------------------------------------------
    # Positioning primitives
    # ------------------------------------------------------------------

    def advance(self, count: int = 1) -> None:
        """Move forward by count characters, clamped to end of text.

        Raises:
            ValueError: If count is negative (use rewind() or move_to())
        """
        if count < 0:
            msg = f"Advance count must be >= 0, got {count}"
            raise ValueError(msg)
        self._pos = min(self._pos + count, len(self._text.characters))

    def rewind(self) -> None:
        """Move back one character. No-op at the start of the text."""
        if self._pos > 0:
            self._pos -= 1

    def move_to(self, pos: int) -> None:
        """Set the position, clamped into [0, end_pos]."""
        self._pos = self._text.clamp(pos)

    def checkpoint(self) -> int:
        """Return the current position for a later restore()."""
        return self._pos

    def restore(self, pos: int) -> None:
        """Return to a position obtained from checkpoint()."""
        self.move_to(pos)

    @contextmanager
    def attempt(self) -> Iterator["Cursor"]:
        """Run a tentative sequence of reads, rewinding if it fails.

        On ScanError the position is restored to where the block started
        and the error is re-raised for the caller to handle.

        Example:
            >>> cursor = Cursor("abc")
            >>> try:
            ...     with cursor.attempt():
            ...         cursor.read("a")
            ...         cursor.read("x")
            ... except ScanError:
            ...     pass
            >>> cursor.pos
            0
        """
        saved = self._pos
        try:
            yield self
        except ScanError:
            logger.debug("Scan attempt failed at %d, restoring position %d", self._pos, saved)
            self._pos = saved
            raise

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def read(self, expected: str) -> None:
        """Consume exactly the expected character.

        Args:
            expected: Character that must be at the current position

        Raises:
            ScanError: At end of text or on a different character.
                Position is unchanged.
        """
        found = self.current
        if found is None or found != expected:
            raise self._error(ErrorTemplate.unexpected_character(expected, found))
        self._pos += 1

    def read_until(
        self,
        delimiter: str,
        *,
        required: bool = True,
        allow_whitespace: bool = True,
        allow_line_breaks: bool = False,
        balance_against: str | None = None,
    ) -> str:
        """Scan up to a delimiter, consuming it, and return the text before it.

        Each step checks, in order:
            1. delimiter at balance 0: done, delimiter consumed
            2. same-line whitespace when not allow_whitespace: blocked
            3. line break when not allow_line_breaks: blocked
            4. balance_against increments, delimiter decrements the balance
            5. consume and continue

        The balance is a single counter, not a stack: it tracks nesting
        depth of one opener/delimiter pair and ignores every other
        bracket kind.

        Args:
            delimiter: Character ending the scan
            required: Raise if the delimiter is not reached
            allow_whitespace: Allow spaces/tabs inside the scanned text
            allow_line_breaks: Allow line breaks inside the scanned text
            balance_against: Opening character whose occurrences must be
                matched by a delimiter before the scan may end

        Returns:
            Text between the start position and the delimiter. When not
            required and the delimiter was not reached, the text scanned
            so far (possibly empty), with no terminator consumed.

        Raises:
            ScanError: If required and scanning stopped on a blocking
                character or at end of text. The cursor stays where
                scanning stopped.

        Example:
            >>> cursor = Cursor("(a(b)c)d")
            >>> cursor.read_until(")", balance_against="(")
            '(a(b)c'
            >>> cursor.current
            'd'
        """
        start = self._pos
        balance = 0

        while not self.is_eof:
            char = self.current
            if char == delimiter and balance == 0:
                result = self.characters(start, self._pos)
                self._pos += 1
                return result

            if not allow_whitespace and is_same_line_whitespace(char):
                break

            if not allow_line_breaks and is_newline(char):
                break

            if balance_against is not None:
                if char == balance_against:
                    balance += 1
                if char == delimiter:
                    balance -= 1

            self._pos += 1

        if required:
            raise self._error(ErrorTemplate.delimiter_not_found(delimiter, self.current))
        return self.characters(start, self._pos)

    def read_count(self, char: str) -> int:
        """Consume a run of one repeated character and return its length.

        Never fails; returns 0 when the current character differs.

        Example:
            >>> cursor = Cursor("###  Title")
            >>> cursor.read_count("#")
            3
        """
        count = 0
        while not self.is_eof and self.current == char:
            self._pos += 1
            count += 1
        return count

    def read_characters(
        self, predicate: Callable[[str], bool], max_count: int | None = None
    ) -> str:
        """Consume characters while predicate holds, up to max_count.

        Args:
            predicate: Test applied to each character (never called with None)
            max_count: Upper bound on characters consumed (None = unbounded)

        Returns:
            The matched text, never empty

        Raises:
            ScanError: If no character matched. Position is unchanged.
            ValueError: If max_count is negative
        """
        if max_count is not None and max_count < 0:
            msg = f"max_count must be >= 0, got {max_count}"
            raise ValueError(msg)

        start = self._pos
        count = 0
        while (
            not self.is_eof
            and (max_count is None or count < max_count)
            and predicate(self._text.characters[self._pos])
        ):
            self._pos += 1
            count += 1

        if count == 0:
            raise self._error(ErrorTemplate.no_matching_characters(self.current))
        return self.characters(start, self._pos)

    def read_character(self, charset: Container[str]) -> str:
        """Consume and return the current character if it is in charset.

        Raises:
            ScanError: At end of text or if the character is not in charset.
                Position is unchanged.
        """
        char = self.current
        if char is None or char not in charset:
            raise self._error(ErrorTemplate.character_not_in_set(_render_charset(charset), char))
        self._pos += 1
        return char

    def read_whitespaces(self) -> str:
        """Consume one or more spaces/tabs (no line breaks).

        Raises:
            ScanError: If the current character is not same-line whitespace
        """
        return self.read_characters(is_same_line_whitespace)

    def read_until_end_of_line(self) -> str:
        """Consume the rest of the line and its line break, if any.

        Returns:
            Text before the line break (possibly empty). Never fails.
        """
        start = self._pos
        while not self.is_eof and not is_newline(self.current):
            self._pos += 1
        result = self.characters(start, self._pos)
        if not self.is_eof:
            self._pos += 1
        return result

    def discard_whitespaces(self) -> None:
        """Skip spaces and tabs. Stops at line breaks."""
        while is_same_line_whitespace(self.current):
            self._pos += 1

    def discard_whitespaces_and_newlines(self) -> None:
        """Skip all whitespace, line breaks included."""
        while is_whitespace(self.current):
            self._pos += 1

    # ------------------------------------------------------------------
    # Failure construction
    # ------------------------------------------------------------------

    def _error(self, diagnostic: Diagnostic) -> ScanError:
        """Attach the current location to a diagnostic and wrap it."""
        line, column = self.compute_line_col()
        end = min(self._pos + 1, self.end_pos)
        span = SourceSpan(
            start=self.offset,
            end=self._text.offsets[end],
            line=line,
            column=column,
        )
        return ScanError(replace(diagnostic, span=span))


def _render_charset(charset: Container[str]) -> str:
    """Printable, deterministic rendering of a charset for error messages."""
    if isinstance(charset, str):
        return repr(charset)
    if isinstance(charset, (set, frozenset, list, tuple)):
        return "{" + ", ".join(repr(c) for c in sorted(charset)) + "}"
    return type(charset).__name__
