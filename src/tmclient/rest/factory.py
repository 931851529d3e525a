"""HTTP session construction for the server REST API.

RestClientFactory owns one requests.Session carrying authentication headers
and hands out per-resource clients. Calls are synchronous; retries,
timeouts and pooling are whatever requests provides by default.

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import requests

from tmclient.config.options import check_mandatory_options
from tmclient.constants import REST_PATH, VERSION_SERVICE_PATH
from tmclient.rest.glossary import GlossaryClient
from tmclient.version import get_version

if TYPE_CHECKING:
    from tmclient.config.options import Options

__all__ = ["RestClientFactory", "create_client_factory"]

logger = logging.getLogger(__name__)


def _major_minor(version: str) -> tuple[str, ...]:
    return tuple(version.split("+", 1)[0].split(".")[:2])


class RestClientFactory:
    """Authenticated session plus per-resource client construction.

    Attributes:
        base_url: Server base URL, always ending with ``/``
        client_version: Version string sent to the server
        session: Shared requests session
    """

    def __init__(
        self,
        base_url: str,
        username: str,
        api_key: str,
        client_version: str,
        *,
        log_http: bool = False,
        disable_ssl_cert: bool = False,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url if base_url.endswith("/") else f"{base_url}/"
        self.client_version = client_version
        self.session = session if session is not None else requests.Session()
        self.session.headers.update({
            "X-Auth-User": username,
            "X-Auth-Token": api_key,
            "X-Client-Version": client_version,
            "Accept": "application/json",
        })
        if disable_ssl_cert:
            self.session.verify = False
        if log_http:
            self.session.hooks["response"].append(self._log_response)

    @staticmethod
    def _log_response(response: requests.Response, *_args: Any, **_kwargs: Any) -> None:
        logger.info(
            "HTTP %s %s -> %s",
            response.request.method,
            response.request.url,
            response.status_code,
        )

    def resource_url(self, service_path: str) -> str:
        """Absolute URL of a REST service path."""
        return f"{self.base_url}{REST_PATH}{service_path}"

    def server_version(self) -> str | None:
        """Ask the server for its version.

        Raises:
            requests.HTTPError: If the server answers with an error status
        """
        response = self.session.get(self.resource_url(VERSION_SERVICE_PATH))
        response.raise_for_status()
        return response.json().get("versionNo")

    def perform_version_check(self) -> None:
        """Warn when server and client major.minor versions differ."""
        server_version = self.server_version()
        if server_version is None:
            logger.warning("Server did not report its version")
            return
        if _major_minor(server_version) != _major_minor(self.client_version):
            logger.warning(
                "Client version %s does not match server version %s; "
                "some commands may not work",
                self.client_version,
                server_version,
            )
        else:
            logger.debug("Server version %s", server_version)

    def glossary_client(self) -> GlossaryClient:
        return GlossaryClient(self.session, self.base_url)


def create_client_factory(opts: Options, *, version_check: bool = True) -> RestClientFactory:
    """Create a factory from merged options.

    Raises:
        ConfigError: If url, username or key is missing
    """
    check_mandatory_options(opts)
    factory = RestClientFactory(
        opts.url,  # type: ignore[arg-type]  # checked above
        opts.username,  # type: ignore[arg-type]
        opts.key,  # type: ignore[arg-type]
        get_version(),
        log_http=opts.log_http,
        disable_ssl_cert=opts.disable_ssl_cert,
    )
    if version_check:
        factory.perform_version_check()
    return factory
