"""textscan exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = ["ScanError", "TextScanError"]


class TextScanError(Exception):
    """Base exception for all textscan errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize TextScanError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class ScanError(TextScanError):
    """The expected character or pattern was not at the cursor position.

    The single failure kind raised by Cursor read operations. The message
    is informational; callers recover by restoring a position they saved
    before the attempt, never by inspecting the error.

    Where the cursor is left after a failure depends on the operation:
    most reads leave it unchanged, Cursor.read_until(required=True) leaves
    it at the point where scanning stopped.
    """
