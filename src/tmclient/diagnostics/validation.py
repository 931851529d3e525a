"""Validation result types for configuration checks.

Mapping rules are validated before any path resolution happens. Problems that
abort the run are ValidationError; suspicious-but-usable input is
ValidationWarning.

Python 3.13+.
"""

from dataclasses import dataclass

__all__ = [
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
]


@dataclass(frozen=True, slots=True)
class ValidationError:
    """Structured validation error.

    Attributes:
        code: Error code (e.g., "invalid-rule")
        message: Human-readable error message
        content: The offending input (e.g. the rule template)
    """

    code: str
    message: str
    content: str

    def format(self) -> str:
        """Format error as human-readable string."""
        return f"[{self.code}]: {self.message} (content: {self.content!r})"


@dataclass(frozen=True, slots=True)
class ValidationWarning:
    """Structured validation warning.

    Attributes:
        code: Warning code (e.g., "unrecognized-variables")
        message: Human-readable warning message
        context: Additional context (e.g., the rule template)
    """

    code: str
    message: str
    context: str | None = None


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Immutable result of a validation pass.

    Attributes:
        errors: Fatal problems
        warnings: Non-fatal problems

    Example:
        >>> result = ValidationResult.valid()
        >>> result.is_valid
        True
    """

    errors: tuple[ValidationError, ...]
    warnings: tuple[ValidationWarning, ...]

    @property
    def is_valid(self) -> bool:
        """True if no errors were found. Warnings do not affect validity."""
        return len(self.errors) == 0

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        return len(self.warnings)

    @staticmethod
    def valid() -> "ValidationResult":
        """Create a valid result with no errors or warnings."""
        return ValidationResult(errors=(), warnings=())

    def format(self, *, include_warnings: bool = True) -> str:
        """Format validation result as human-readable string.

        Args:
            include_warnings: If True (default), include warnings in output.

        Returns:
            Formatted string with errors and optionally warnings.
        """
        lines: list[str] = []

        if self.errors:
            lines.append(f"Errors ({len(self.errors)}):")
            for error in self.errors:
                lines.append(f"  {error.format()}")

        if include_warnings and self.warnings:
            lines.append(f"Warnings ({len(self.warnings)}):")
            for warning in self.warnings:
                context = f" ({warning.context})" if warning.context else ""
                lines.append(f"  [{warning.code}]: {warning.message}{context}")

        if not lines:
            return "Validation passed: no errors or warnings"

        return "\n".join(lines)
