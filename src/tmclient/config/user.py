"""User config file loading.

The user config is an INI file in the user's home directory::

    [defaults]
    debug = false
    quiet = true

    [servers]
    example.url = https://tm.example.com/
    example.username = jdoe
    example.key = 0123456789abcdef

Credentials for a server are found by matching the configured server URL
against the ``<prefix>.url`` entries of ``[servers]``.

Python 3.13+.
"""

from __future__ import annotations

import configparser
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from tmclient.diagnostics import ConfigError, ErrorTemplate

__all__ = [
    "ServerCredentials",
    "UserConfig",
    "find_server_prefix",
    "load_user_config",
    "parse_user_config",
]

logger = logging.getLogger(__name__)

_URL_SUFFIX = ".url"


@dataclass(frozen=True, slots=True)
class ServerCredentials:
    """Username and API key stored for one server."""

    username: str | None = None
    key: str | None = None


@dataclass(frozen=True, slots=True)
class UserConfig:
    """Contents of a user config file.

    Attributes:
        debug: ``[defaults] debug``, None when absent
        errors: ``[defaults] errors``, None when absent
        quiet: ``[defaults] quiet``, None when absent
        servers: Raw ``[servers]`` entries keyed ``<prefix>.<field>``
    """

    debug: bool | None = None
    errors: bool | None = None
    quiet: bool | None = None
    servers: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def credentials_for(self, url: str) -> ServerCredentials | None:
        """Find the credentials configured for a server URL.

        Returns:
            ServerCredentials, or None if no ``<prefix>.url`` matches
        """
        prefix = find_server_prefix(self.servers, url)
        if prefix is None:
            return None
        return ServerCredentials(
            username=self.servers.get(f"{prefix}.username"),
            key=self.servers.get(f"{prefix}.key"),
        )


def _normalize_url(url: str) -> str:
    return url.strip().rstrip("/") + "/"


def find_server_prefix(servers: Mapping[str, str], url: str) -> str | None:
    """Find the ``[servers]`` prefix whose URL equals ``url``.

    Comparison ignores a trailing slash. The first matching entry wins.

    Example:
        >>> find_server_prefix({"prod.url": "https://tm.example.com"}, "https://tm.example.com/")
        'prod'
    """
    wanted = _normalize_url(url)
    for key, value in servers.items():
        if key.endswith(_URL_SUFFIX) and _normalize_url(value) == wanted:
            return key[: -len(_URL_SUFFIX)]
    return None


def _get_boolean(parser: configparser.ConfigParser, option: str, location: str) -> bool | None:
    try:
        return parser.getboolean("defaults", option, fallback=None)
    except ValueError as e:
        raise ConfigError(ErrorTemplate.user_config_invalid(location, str(e))) from e


def parse_user_config(text: str, location: str = "<string>") -> UserConfig:
    """Parse user config INI text.

    Raises:
        ConfigError: If the text is not valid INI or a boolean is malformed
    """
    parser = configparser.ConfigParser(interpolation=None)
    # keys such as "prod.username" are case-sensitive
    parser.optionxform = str  # type: ignore[assignment,method-assign]
    try:
        parser.read_string(text, source=location)
    except configparser.Error as e:
        raise ConfigError(ErrorTemplate.user_config_invalid(location, str(e))) from e

    servers = dict(parser.items("servers")) if parser.has_section("servers") else {}
    return UserConfig(
        debug=_get_boolean(parser, "debug", location),
        errors=_get_boolean(parser, "errors", location),
        quiet=_get_boolean(parser, "quiet", location),
        servers=MappingProxyType(servers),
    )


def load_user_config(path: Path) -> UserConfig:
    """Read and parse a user config file.

    Raises:
        ConfigError: If the file is malformed
        OSError: If the file cannot be read
    """
    logger.info("Loading user config from %s", path)
    return parse_user_config(path.read_text(encoding="utf-8"), str(path))
