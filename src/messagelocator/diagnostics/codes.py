"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Configuration errors (unsupported locales, missing paths)
        2000-2999: Fragment errors (fetch and parse failures)
    """

    # Configuration errors (1000-1999)
    UNSUPPORTED_LOCALE = 1001
    MISSING_PATH_COMPONENT = 1002
    INVALID_LOCALE = 1003
    DUPLICATE_LOCALE = 1004

    # Fragment errors (2000-2999)
    FRAGMENT_FETCH_FAILED = 2001
    FRAGMENT_PARSE_FAILED = 2002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        locale: Locale tag involved in the failure, if any
        path: Fragment path involved in the failure, if any
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    locale: str | None = None
    path: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler message.

        Example output:
            error[UNSUPPORTED_LOCALE]: Unsupported locale 'fr'
              = locale: fr
              = help: Add the locale to supported_locales

        Returns:
            Formatted error message
        """
        lines = [f"{self.severity}[{self.code.name}]: {_escape(self.message)}"]
        if self.locale is not None:
            lines.append(f"  = locale: {_escape(self.locale)}")
        if self.path is not None:
            lines.append(f"  = path: {_escape(self.path)}")
        if self.hint is not None:
            lines.append(f"  = help: {_escape(self.hint)}")
        return "\n".join(lines)


def _escape(text: str) -> str:
    # Keep each diagnostic on its own log lines.
    return text.replace("\r", "\\r").replace("\n", "\\n")
