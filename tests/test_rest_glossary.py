"""Tests for the glossary REST client and transfer objects."""

from unittest.mock import Mock

import pytest
import requests

from tmclient.rest.dto import Glossary, GlossaryEntry, GlossaryTerm
from tmclient.rest.glossary import GlossaryClient

BASE = "https://tm.example.com/"
GLOSSARY = Glossary(
    glossary_entries=(
        GlossaryEntry(
            src_lang="en-US",
            glossary_terms=(GlossaryTerm("file", "en-US"), GlossaryTerm("Datei", "de-DE", ("noun",))),
            source_reference="ui.txt:3",
        ),
    )
)


def _client() -> tuple[GlossaryClient, Mock]:
    session = Mock(spec=requests.Session)
    return GlossaryClient(session, BASE), session


class TestGlossaryDto:
    """camelCase JSON representation."""

    def test_to_json(self) -> None:
        assert GLOSSARY.to_json() == {
            "glossaryEntries": [
                {
                    "srcLang": "en-US",
                    "glossaryTerms": [
                        {"content": "file", "locale": "en-US", "comments": []},
                        {"content": "Datei", "locale": "de-DE", "comments": ["noun"]},
                    ],
                    "sourceReference": "ui.txt:3",
                }
            ]
        }

    def test_entry_without_reference(self) -> None:
        assert "sourceReference" not in GlossaryEntry("en-US").to_json()


class TestGlossaryClient:
    """One request per call; error statuses raise."""

    def test_put(self) -> None:
        client, session = _client()
        client.put(GLOSSARY)
        session.put.assert_called_once_with(f"{BASE}rest/glossary", json=GLOSSARY.to_json())
        session.put.return_value.raise_for_status.assert_called_once_with()

    def test_delete_locale(self) -> None:
        client, session = _client()
        client.delete("de-DE")
        session.delete.assert_called_once_with(f"{BASE}rest/glossary/de-DE")

    def test_delete_locale_is_quoted(self) -> None:
        client, session = _client()
        client.delete("x/y z")
        session.delete.assert_called_once_with(f"{BASE}rest/glossary/x%2Fy%20z")

    def test_delete_all(self) -> None:
        client, session = _client()
        client.delete_all()
        session.delete.assert_called_once_with(f"{BASE}rest/glossary")
        session.delete.return_value.raise_for_status.assert_called_once_with()

    def test_error_status_raises(self) -> None:
        client, session = _client()
        session.delete.return_value.raise_for_status.side_effect = requests.HTTPError("404")
        with pytest.raises(requests.HTTPError):
            client.delete("de-DE")

    def test_transport_error_propagates(self) -> None:
        client, session = _client()
        session.put.side_effect = requests.ConnectionError("refused")
        with pytest.raises(requests.ConnectionError):
            client.put(GLOSSARY)
