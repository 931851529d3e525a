"""In-memory document model.

A Resource is one source document: an ordered tuple of TextFlow segments.
Segment metadata travels as SimpleComment extensions; XLIFF context entries
are encoded as ``"group,context-type,value"`` comments.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass

from tmclient.constants import CONTEXT_DELIMITER

__all__ = [
    "ContextEntry",
    "Resource",
    "SimpleComment",
    "TextFlow",
]


@dataclass(frozen=True, slots=True)
class ContextEntry:
    """One decoded XLIFF context.

    Attributes:
        group: Name of the enclosing context-group
        context_type: The context-type attribute
        value: Text content
    """

    group: str
    context_type: str
    value: str

    def to_comment(self) -> SimpleComment:
        """Encode as a delimiter-separated comment."""
        return SimpleComment(
            CONTEXT_DELIMITER.join((self.group, self.context_type, self.value))
        )


@dataclass(frozen=True, slots=True)
class SimpleComment:
    """Free-text extension attached to a text flow."""

    value: str

    def to_context(self) -> ContextEntry | None:
        """Decode a context comment.

        Only the first two delimiters split, so the value may itself contain
        the delimiter.

        Returns:
            ContextEntry, or None if the comment has fewer than three fields
        """
        parts = self.value.split(CONTEXT_DELIMITER, 2)
        if len(parts) < 3:
            return None
        return ContextEntry(group=parts[0], context_type=parts[1], value=parts[2])


@dataclass(frozen=True, slots=True)
class TextFlow:
    """One translatable segment.

    Attributes:
        id: Segment id, unique within the resource
        content: Source text
        extensions: Attached comments, in order
    """

    id: str
    content: str
    extensions: tuple[SimpleComment, ...] = ()


@dataclass(frozen=True, slots=True)
class Resource:
    """A source document.

    Attributes:
        name: Document name; also the relative output file name
        lang: Source locale id
        text_flows: Segments in document order
    """

    name: str
    lang: str
    text_flows: tuple[TextFlow, ...] = ()
