"""tmclient - client for a translation-management server.

Maps source documents to translation files, merges command line options
with project and user config files, writes XLIFF 1.1 documents and pushes
glossaries over the REST API.

Public API:
    Options - Merged client options
    apply_config_files - Layer project and user config under command line options
    TransFileResolver - Source document to translation file resolution
    XliffWriter - XLIFF 1.1 serialization of a source resource
    RestClientFactory - Authenticated REST session and service clients

Exceptions:
    TmClientError - Base exception class
    ConfigError - Missing or invalid configuration
    InvalidMappingRuleError - File mapping rules without a locale placeholder
    UserAbortError - Negative answer at a confirmation prompt

Submodules:
    tmclient.config - Config files, option layers, console interaction
    tmclient.mapping - Placeholders, rule handlers, resolver
    tmclient.adapters - XLIFF and gettext serialization
    tmclient.rest - REST client factory, glossary client, DTOs
    tmclient.diagnostics - Error types and validation results
"""

# Essential Public API - Minimal exports for clean namespace
from .adapters.xliff import XliffWriter
from .config.options import Options, apply_config_files
from .diagnostics import (
    ConfigError,
    InvalidMappingRuleError,
    TmClientError,
    UserAbortError,
)
from .enums import ProjectType
from .mapping.resolver import TransFileResolver
from .rest.factory import RestClientFactory
from .version import get_version

# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
__version__ = get_version()

__all__ = [
    "ConfigError",
    "InvalidMappingRuleError",
    "Options",
    "ProjectType",
    "RestClientFactory",
    "TmClientError",
    "TransFileResolver",
    "UserAbortError",
    "XliffWriter",
    "__version__",
    "apply_config_files",
]
