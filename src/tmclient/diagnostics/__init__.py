"""Diagnostic system for client errors.

Provides structured error diagnostics with codes, hints and locations.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    ConfigError,
    HookError,
    InvalidMappingRuleError,
    PoSerializationError,
    SerializationError,
    TmClientError,
    UserAbortError,
    XliffFormatError,
    XliffSerializationError,
)
from .templates import ErrorTemplate
from .validation import ValidationError, ValidationResult, ValidationWarning

__all__ = [
    "ConfigError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "HookError",
    "InvalidMappingRuleError",
    "PoSerializationError",
    "SerializationError",
    "TmClientError",
    "UserAbortError",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "XliffFormatError",
    "XliffSerializationError",
]
