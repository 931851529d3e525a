"""Gettext adapters built on babel.messages.

Components:
    write_pot - Write a Resource as a gettext template (.pot)
    read_glossary_po - Read a PO glossary (msgid = source term,
        msgstr = translated term, translator comments = term comments)

Python 3.13+.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from babel.core import UnknownLocaleError
from babel.messages.catalog import Catalog
from babel.messages.pofile import read_po, write_po

from tmclient.diagnostics import ConfigError, ErrorTemplate, PoSerializationError
from tmclient.locale_utils import canonical_locale_id
from tmclient.rest.dto import Glossary, GlossaryEntry, GlossaryTerm

if TYPE_CHECKING:
    from tmclient.adapters.resource import Resource

__all__ = ["read_glossary_po", "write_pot"]

logger = logging.getLogger(__name__)


def _pot_name(doc_name: str) -> str:
    path = Path(doc_name)
    return str(path.with_suffix(".pot")) if path.suffix != ".pot" else doc_name


def _glossary_locale(locale_id: str) -> str:
    try:
        return canonical_locale_id(locale_id)
    except (UnknownLocaleError, ValueError) as e:
        raise ConfigError(ErrorTemplate.locale_invalid(locale_id, str(e))) from e


def write_pot(base_dir: Path, doc: Resource) -> Path:
    """Write a resource as a gettext template.

    Each text flow becomes one message; the text flow id is stored as
    msgctxt so duplicate source strings stay distinct. Comments become
    extracted (``#.``) comments.

    Returns:
        Path of the written ``.pot`` file

    Raises:
        PoSerializationError: If the directory or file cannot be written
    """
    catalog = Catalog(project=Path(doc.name).stem, fuzzy=False)
    for text_flow in doc.text_flows:
        if not text_flow.content:
            # an empty msgid is the catalog header
            logger.warning("Skipping text flow '%s' with empty content", text_flow.id)
            continue
        catalog.add(
            text_flow.content,
            context=text_flow.id,
            auto_comments=[comment.value for comment in text_flow.extensions],
        )

    output = Path(base_dir) / _pot_name(doc.name)
    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        with output.open("wb") as stream:
            write_po(stream, catalog)
    except OSError as e:
        raise PoSerializationError(ErrorTemplate.po_write_failed(str(output))) from e

    logger.info("Wrote %d messages to %s", len(doc.text_flows), output)
    return output


def read_glossary_po(path: Path, src_locale: str, trans_locale: str) -> Glossary:
    """Read a PO file as a glossary.

    Entries with an empty msgstr contribute only the source term. Locale ids
    are canonicalized to BCP-47 via Babel.

    Args:
        path: PO file
        src_locale: Locale of msgid strings
        trans_locale: Locale of msgstr strings

    Raises:
        ConfigError: If a locale id is malformed or not recognized
        OSError: If the file cannot be read
    """
    src = _glossary_locale(src_locale)
    trans = _glossary_locale(trans_locale)
    with Path(path).open("rb") as stream:
        catalog = read_po(stream, ignore_obsolete=True)

    entries: list[GlossaryEntry] = []
    for message in catalog:
        if not message.id or isinstance(message.id, tuple):
            # header entry, or plural forms which a glossary cannot represent
            continue
        terms = [GlossaryTerm(content=message.id, locale=src, comments=tuple(message.auto_comments))]
        if isinstance(message.string, str) and message.string:
            terms.append(
                GlossaryTerm(content=message.string, locale=trans, comments=tuple(message.user_comments))
            )
        reference = ", ".join(f"{filename}:{line}" if line else filename
                              for filename, line in message.locations)
        entries.append(
            GlossaryEntry(src_lang=src, source_reference=reference or None, glossary_terms=tuple(terms))
        )

    logger.info("Read %d glossary entries from %s", len(entries), path)
    return Glossary(glossary_entries=tuple(entries))
