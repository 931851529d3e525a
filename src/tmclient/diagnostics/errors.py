"""Client exception hierarchy with structured diagnostics.

All exceptions optionally store a Diagnostic object for rich error output.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class TmClientError(Exception):
    """Base exception for all client errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize TmClientError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class ConfigError(TmClientError):
    """Invalid or incomplete client configuration.

    Raised for missing mandatory options (server URL, username, API key),
    unknown project types, and unreadable config files. Always fatal.
    """


class InvalidMappingRuleError(ConfigError):
    """One or more file mapping rules cannot be used.

    Raised during rule validation, before any path resolution happens.

    Attributes:
        rules: The offending rule templates
    """

    def __init__(self, message: str | Diagnostic, rules: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.rules = rules


class UserAbortError(TmClientError):
    """The user declined an interactive confirmation."""


class SerializationError(TmClientError):
    """Base class for document serialization failures."""


class XliffSerializationError(SerializationError):
    """XLIFF output could not be generated or written.

    The underlying OSError or lxml error is chained as __cause__.
    """


class XliffFormatError(SerializationError):
    """XLIFF input does not have the expected structure."""


class PoSerializationError(SerializationError):
    """Gettext template could not be written."""


class HookError(TmClientError):
    """A before/after command hook exited with a non-zero status."""
