"""textscan - character-level scanning cursor for hand-written parsers.

A Cursor walks an in-memory string one character at a time with
lookahead/lookbehind, predicate-driven consumption, delimiter scans that
balance one bracket pair, and whitespace/line-break handling. Grammar,
tokens and AST belong to the parser built on top of it.

Public API:
    Cursor - Mutable scan position over an immutable text
    SourceText - Character-segmented text shared by cursor copies
    ScanError - The single failure raised by cursor reads

Exceptions:
    TextScanError - Base exception class
    ScanError - Expected character or pattern not found

Submodules:
    textscan.syntax.characters - Classification predicates
    textscan.diagnostics - Diagnostic codes and message templates

Usage:
    >>> cursor = Cursor("key = value")
    >>> key = cursor.read_until("=").strip()
    >>> cursor.discard_whitespaces()
    >>> key, cursor.read_until_end_of_line()
    ('key', 'value')
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import ScanError, TextScanError
from .syntax import Cursor, SourceText

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("textscan")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Cursor",
    "ScanError",
    "SourceText",
    "TextScanError",
    "__version__",
]
