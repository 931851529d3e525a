"""Glossary REST resource.

One method per endpoint, one synchronous request per call. Error statuses
raise requests.HTTPError; transport failures propagate unchanged.

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from urllib.parse import quote

from tmclient.constants import GLOSSARY_SERVICE_PATH, REST_PATH

if TYPE_CHECKING:
    import requests

    from tmclient.rest.dto import Glossary

__all__ = ["GlossaryClient"]

logger = logging.getLogger(__name__)


class GlossaryClient:
    """Client for the glossary service.

    Example:
        >>> client = factory.glossary_client()
        >>> client.put(glossary)
        >>> client.delete("de-DE")
        >>> client.delete_all()
    """

    __slots__ = ("_session", "_url")

    def __init__(self, session: requests.Session, base_url: str) -> None:
        self._session = session
        self._url = f"{base_url}{REST_PATH}{GLOSSARY_SERVICE_PATH}"

    def put(self, glossary: Glossary) -> None:
        """Replace glossary entries in bulk.

        Raises:
            requests.HTTPError: On an error status
        """
        logger.debug("Pushing %d glossary entries", len(glossary.glossary_entries))
        response = self._session.put(self._url, json=glossary.to_json())
        response.raise_for_status()

    def delete(self, locale: str) -> None:
        """Delete all glossary terms of one locale.

        Raises:
            requests.HTTPError: On an error status
        """
        response = self._session.delete(f"{self._url}/{quote(locale, safe='')}")
        response.raise_for_status()

    def delete_all(self) -> None:
        """Delete the whole glossary.

        Raises:
            requests.HTTPError: On an error status
        """
        response = self._session.delete(self._url)
        response.raise_for_status()
