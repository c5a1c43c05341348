"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


def _describe(char: str | None) -> str:
    """Render a character for an error message, escaping control codes."""
    if char is None:
        return "end of text"
    return repr(char)


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and consistent, and documents every way a
    scan can fail. Every template returns the same SCAN_FAILED code: the
    message text varies, the failure kind does not.
    """

    _BACKTRACK_HINT = "Save the cursor position before a tentative read and restore it on failure"

    @staticmethod
    def unexpected_character(expected: str, found: str | None) -> Diagnostic:
        """A specific character was expected at the cursor.

        Args:
            expected: The character the caller asked for
            found: The character actually present (None at end of text)

        Returns:
            Diagnostic for SCAN_FAILED
        """
        msg = f"Expected {_describe(expected)}, found {_describe(found)}"
        return Diagnostic(
            code=DiagnosticCode.SCAN_FAILED,
            message=msg,
            hint=ErrorTemplate._BACKTRACK_HINT,
        )

    @staticmethod
    def character_not_in_set(charset: str, found: str | None) -> Diagnostic:
        """The current character is not a member of the allowed set.

        Args:
            charset: Printable rendering of the allowed characters
            found: The character actually present (None at end of text)

        Returns:
            Diagnostic for SCAN_FAILED
        """
        msg = f"Expected one of {charset}, found {_describe(found)}"
        return Diagnostic(
            code=DiagnosticCode.SCAN_FAILED,
            message=msg,
            hint=ErrorTemplate._BACKTRACK_HINT,
        )

    @staticmethod
    def delimiter_not_found(delimiter: str, stopped_at: str | None) -> Diagnostic:
        """A bounded scan ended before reaching its delimiter.

        Args:
            delimiter: The delimiter the scan was looking for
            stopped_at: Character that blocked the scan (None if text ran out)

        Returns:
            Diagnostic for SCAN_FAILED
        """
        msg = f"Expected {_describe(delimiter)} before {_describe(stopped_at)}"
        return Diagnostic(
            code=DiagnosticCode.SCAN_FAILED,
            message=msg,
            hint="Check for an unclosed delimiter or a disallowed whitespace/line break",
        )

    @staticmethod
    def no_matching_characters(found: str | None) -> Diagnostic:
        """A predicate-driven run matched zero characters.

        Args:
            found: The first character that failed the predicate

        Returns:
            Diagnostic for SCAN_FAILED
        """
        msg = f"Expected at least one matching character, found {_describe(found)}"
        return Diagnostic(
            code=DiagnosticCode.SCAN_FAILED,
            message=msg,
            hint=ErrorTemplate._BACKTRACK_HINT,
        )
