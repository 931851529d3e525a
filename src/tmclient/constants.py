"""Shared constants for tmclient.

Wire-format namespaces, REST service paths and default file locations live
here so adapters, config loaders and the CLI agree on them.

Python 3.13+.
"""

from pathlib import Path
from typing import Final

# XLIFF 1.1
XLIFF_NS: Final[str] = "urn:oasis:names:tc:xliff:document:1.1"
XLIFF_APPINFO_NS: Final[str] = "urn:appInfo:Items"
XSI_NS: Final[str] = "http://www.w3.org/2001/XMLSchema-instance"
XLIFF_SCHEMA_LOCATION: Final[str] = (
    f"{XLIFF_NS} http://www.oasis-open.org/committees/xliff/documents/xliff-core-1.1.xsd"
)
XLIFF_VERSION: Final[str] = "1.1"
XLIFF_DATATYPE: Final[str] = "plaintext"
XLIFF_HEADER_COMMENT: Final[str] = "XLIFF document generated by tmclient."

# Separates group name, context type and value inside a context comment.
CONTEXT_DELIMITER: Final[str] = ","

# REST
REST_PATH: Final[str] = "rest/"
GLOSSARY_SERVICE_PATH: Final[str] = "glossary"
VERSION_SERVICE_PATH: Final[str] = "version"

# Config files
DEFAULT_USER_CONFIG: Final[Path] = Path("~/.config/tmclient.ini").expanduser()
DEFAULT_PROJECT_CONFIG: Final[Path] = Path("tmclient.xml")

# Project config XML namespace (optional; parsing ignores namespaces).
PROJECT_CONFIG_NS: Final[str] = "urn:tmclient:config:1.0"

__all__ = [
    "CONTEXT_DELIMITER",
    "DEFAULT_PROJECT_CONFIG",
    "DEFAULT_USER_CONFIG",
    "GLOSSARY_SERVICE_PATH",
    "PROJECT_CONFIG_NS",
    "REST_PATH",
    "VERSION_SERVICE_PATH",
    "XLIFF_APPINFO_NS",
    "XLIFF_DATATYPE",
    "XLIFF_HEADER_COMMENT",
    "XLIFF_NS",
    "XLIFF_SCHEMA_LOCATION",
    "XLIFF_VERSION",
    "XSI_NS",
]
