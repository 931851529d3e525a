"""Glossary transfer objects.

JSON field names follow the server's camelCase representation.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = ["Glossary", "GlossaryEntry", "GlossaryTerm"]


@dataclass(frozen=True, slots=True)
class GlossaryTerm:
    """A term in one locale."""

    content: str
    locale: str
    comments: tuple[str, ...] = ()

    def to_json(self) -> dict[str, Any]:
        return {"content": self.content, "locale": self.locale, "comments": list(self.comments)}


@dataclass(frozen=True, slots=True)
class GlossaryEntry:
    """A source term and its translations."""

    src_lang: str
    glossary_terms: tuple[GlossaryTerm, ...] = ()
    source_reference: str | None = None

    def to_json(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "srcLang": self.src_lang,
            "glossaryTerms": [term.to_json() for term in self.glossary_terms],
        }
        if self.source_reference is not None:
            data["sourceReference"] = self.source_reference
        return data


@dataclass(frozen=True, slots=True)
class Glossary:
    """Body of a bulk glossary replace."""

    glossary_entries: tuple[GlossaryEntry, ...] = ()

    def to_json(self) -> dict[str, Any]:
        return {"glossaryEntries": [entry.to_json() for entry in self.glossary_entries]}
