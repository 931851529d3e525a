"""Document model and localization file format adapters.

Components:
    Resource / TextFlow / SimpleComment - In-memory source document
    XliffWriter / XliffReader - XLIFF 1.1 output and input (lxml)
    write_pot / read_glossary_po - Gettext template output and PO glossaries (Babel)

Python 3.13+.
"""

from .po import read_glossary_po, write_pot
from .resource import ContextEntry, Resource, SimpleComment, TextFlow
from .xliff import XliffReader, XliffWriter, group_contexts

__all__ = [
    "ContextEntry",
    "Resource",
    "SimpleComment",
    "TextFlow",
    "XliffReader",
    "XliffWriter",
    "group_contexts",
    "read_glossary_po",
    "write_pot",
]
