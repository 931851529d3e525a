"""XLIFF 1.1 writer and reader.

Output structure::

    <?xml version='1.0' encoding='utf-8'?>
    <!--XLIFF document generated by tmclient.-->
    <xliff xmlns="urn:oasis:names:tc:xliff:document:1.1" ... version="1.1">
      <file source-language="en-US" datatype="plaintext">
        <body>
          <trans-unit id="...">
            <source>...</source>
            <context-group name="...">
              <context context-type="...">...</context>
            </context-group>
          </trans-unit>
        </body>
      </file>
    </xliff>

Context groups are emitted in first-seen order of their names; contexts keep
their input order within a group.

Python 3.13+.
"""

from __future__ import annotations

import logging
from pathlib import Path

from lxml import etree

from tmclient.adapters.resource import ContextEntry, Resource, SimpleComment, TextFlow
from tmclient.constants import (
    XLIFF_APPINFO_NS,
    XLIFF_DATATYPE,
    XLIFF_HEADER_COMMENT,
    XLIFF_NS,
    XLIFF_SCHEMA_LOCATION,
    XLIFF_VERSION,
    XSI_NS,
)
from tmclient.diagnostics import ErrorTemplate, XliffFormatError, XliffSerializationError

__all__ = ["XliffReader", "XliffWriter", "group_contexts"]

logger = logging.getLogger(__name__)

_ELE_XLIFF = "xliff"
_ELE_FILE = "file"
_ELE_BODY = "body"
_ELE_TRANS_UNIT = "trans-unit"
_ELE_SOURCE = "source"
_ELE_CONTEXT_GROUP = "context-group"
_ELE_CONTEXT = "context"
_ATTRI_ID = "id"
_ATTRI_NAME = "name"
_ATTRI_SOURCE_LANGUAGE = "source-language"
_ATTRI_DATATYPE = "datatype"
_ATTRI_CONTEXT_TYPE = "context-type"

_NSMAP = {None: XLIFF_NS, "xyz": XLIFF_APPINFO_NS, "xsi": XSI_NS}


def _q(name: str) -> str:
    """Qualify an element name with the XLIFF namespace."""
    return f"{{{XLIFF_NS}}}{name}"


def group_contexts(text_flow: TextFlow) -> dict[str, list[ContextEntry]]:
    """Group a text flow's context comments by group name.

    Malformed comments (fewer than three fields) are logged and skipped.

    Returns:
        Group name to entries, in first-seen group order
    """
    groups: dict[str, list[ContextEntry]] = {}
    for comment in text_flow.extensions:
        entry = comment.to_context()
        if entry is None:
            logger.warning(
                "Skipping malformed context comment on text flow '%s': %r",
                text_flow.id,
                comment.value,
            )
            continue
        groups.setdefault(entry.group, []).append(entry)
    return groups


class XliffWriter:
    """Serialize a Resource to an XLIFF 1.1 file.

    Thread-safe; no instance state.
    """

    __slots__ = ()

    def build_tree(self, doc: Resource) -> etree._ElementTree:
        """Build the XLIFF document tree for a resource.

        Raises:
            ValueError: If text contains characters not allowed in XML
        """
        root = etree.Element(_q(_ELE_XLIFF), nsmap=_NSMAP)
        root.set(f"{{{XSI_NS}}}schemaLocation", XLIFF_SCHEMA_LOCATION)
        root.set("version", XLIFF_VERSION)

        file_element = etree.SubElement(root, _q(_ELE_FILE))
        file_element.set(_ATTRI_SOURCE_LANGUAGE, doc.lang)
        file_element.set(_ATTRI_DATATYPE, XLIFF_DATATYPE)
        body = etree.SubElement(file_element, _q(_ELE_BODY))

        for text_flow in doc.text_flows:
            self._write_trans_unit(body, text_flow)

        root.addprevious(etree.Comment(XLIFF_HEADER_COMMENT))
        return etree.ElementTree(root)

    def _write_trans_unit(self, body: etree._Element, text_flow: TextFlow) -> None:
        trans_unit = etree.SubElement(body, _q(_ELE_TRANS_UNIT))
        trans_unit.set(_ATTRI_ID, text_flow.id)
        source = etree.SubElement(trans_unit, _q(_ELE_SOURCE))
        source.text = text_flow.content

        for group_name, entries in group_contexts(text_flow).items():
            context_group = etree.SubElement(trans_unit, _q(_ELE_CONTEXT_GROUP))
            context_group.set(_ATTRI_NAME, group_name)
            for entry in entries:
                context = etree.SubElement(context_group, _q(_ELE_CONTEXT))
                context.set(_ATTRI_CONTEXT_TYPE, entry.context_type)
                context.text = entry.value

    def write(self, base_dir: Path, doc: Resource) -> Path:
        """Write a resource to ``base_dir / doc.name``.

        Missing directories are created.

        Returns:
            Path of the written file

        Raises:
            XliffSerializationError: If the tree cannot be built, a directory
                cannot be created or the file cannot be written
        """
        output = Path(base_dir) / doc.name
        try:
            tree = self.build_tree(doc)
        except ValueError as e:
            raise XliffSerializationError(
                ErrorTemplate.xliff_generation_failed(str(output))
            ) from e

        try:
            output.parent.mkdir(parents=True, exist_ok=True)
            with output.open("wb") as stream:
                tree.write(stream, encoding="utf-8", xml_declaration=True, pretty_print=True)
        except OSError as e:
            raise XliffSerializationError(ErrorTemplate.xliff_write_failed(str(output))) from e

        logger.info("Wrote %d trans-units to %s", len(doc.text_flows), output)
        return output


class XliffReader:
    """Read the XLIFF subset produced by XliffWriter back into a Resource.

    Extra elements (targets, notes, alt-trans) are ignored.
    """

    __slots__ = ()

    def read(self, path: Path, name: str | None = None) -> Resource:
        """Parse an XLIFF file.

        Args:
            path: File to read
            name: Resource name; defaults to the file name

        Raises:
            XliffFormatError: If the file is not well-formed or lacks
                required elements/attributes
            OSError: If the file cannot be read
        """
        parser = etree.XMLParser(resolve_entities=False, no_network=True)
        try:
            root = etree.parse(str(path), parser).getroot()
        except etree.XMLSyntaxError as e:
            raise XliffFormatError(ErrorTemplate.xliff_malformed(str(path), str(e))) from e

        file_element = root.find(_q(_ELE_FILE))
        if file_element is None:
            raise XliffFormatError(ErrorTemplate.xliff_malformed(str(path), "missing <file>"))

        text_flows = tuple(
            self._read_trans_unit(trans_unit, path)
            for trans_unit in file_element.iterfind(f"{_q(_ELE_BODY)}/{_q(_ELE_TRANS_UNIT)}")
        )
        return Resource(
            name=name if name is not None else Path(path).name,
            lang=file_element.get(_ATTRI_SOURCE_LANGUAGE, ""),
            text_flows=text_flows,
        )

    def _read_trans_unit(self, trans_unit: etree._Element, path: Path) -> TextFlow:
        unit_id = trans_unit.get(_ATTRI_ID)
        if not unit_id:
            raise XliffFormatError(
                ErrorTemplate.xliff_malformed(
                    str(path), f"trans-unit without id at line {trans_unit.sourceline}"
                )
            )
        source = trans_unit.find(_q(_ELE_SOURCE))
        content = "".join(source.itertext()) if source is not None else ""

        comments: list[SimpleComment] = []
        for context_group in trans_unit.iterfind(_q(_ELE_CONTEXT_GROUP)):
            group_name = context_group.get(_ATTRI_NAME, "")
            for context in context_group.iterfind(_q(_ELE_CONTEXT)):
                entry = ContextEntry(
                    group=group_name,
                    context_type=context.get(_ATTRI_CONTEXT_TYPE, ""),
                    value=context.text or "",
                )
                comments.append(entry.to_comment())
        return TextFlow(id=unit_id, content=content, extensions=tuple(comments))
