"""Diagnostic codes and data structures.

Defines error codes and the structured diagnostic carried by client errors.
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
        1000-1999: Configuration errors (missing options, unreadable files)
        2000-2999: File mapping errors (rules, project types, document names)
        3000-3999: Serialization errors (XLIFF, gettext)
        4000-4999: Interaction errors (console confirmation, command hooks)
    """

    # Configuration errors (1000-1999)
    URL_REQUIRED = 1001
    USERNAME_REQUIRED = 1002
    API_KEY_REQUIRED = 1003
    PROJECT_CONFIG_INVALID = 1004
    USER_CONFIG_INVALID = 1005
    LOCALE_INVALID = 1006

    # File mapping errors (2000-2999)
    PROJECT_TYPE_UNKNOWN = 2001
    PROJECT_TYPE_REQUIRED = 2002
    NO_DEFAULT_MAPPING = 2003
    MAPPING_RULE_INVALID = 2004
    MAPPING_RULE_SUSPICIOUS = 2005
    DOC_NAME_UNQUALIFIABLE = 2006

    # Serialization errors (3000-3999)
    XLIFF_WRITE_FAILED = 3001
    XLIFF_GENERATION_FAILED = 3002
    XLIFF_MALFORMED = 3003
    PO_WRITE_FAILED = 3004

    # Interaction errors (4000-4999)
    USER_ABORTED = 4001
    HOOK_FAILED = 4002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        location: File (or rule) the error refers to
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    location: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic for terminal output.

        Example output:
            error[NO_DEFAULT_MAPPING]: No default mapping rule for project type 'xliff'
              --> tmclient.xml
              = help: Add a <rule> for this project type

        Returns:
            Formatted error message
        """
        lines = [f"{self.severity}[{self.code.name}]: {self.message}"]
        if self.location:
            lines.append(f"  --> {self.location}")
        if self.hint:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
