"""Hypothesis strategies for tmclient property-based testing.

Strategies are organized by domain:

- mapping: document names, locale mappings, project types, mapping rules
- documents: XLIFF contexts, text flows, resources

Usage:
    from tests.strategies import qualified_doc_names, locale_mappings
    from tests.strategies.documents import resources

Event-Emitting Strategies:
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - qualified_doc_names, locale_mappings, context_entries, text_flows
"""

from .documents import (
    context_entries,
    names,
    resources,
    text_flow_ids,
    text_flows,
    xml_text,
)
from .mapping import (
    extensions,
    file_stems,
    invalid_rules,
    locale_ids,
    locale_mappings,
    mapping_rules,
    path_segments,
    project_types,
    qualified_doc_names,
    valid_rules,
)

__all__ = [
    "context_entries",
    "extensions",
    "file_stems",
    "invalid_rules",
    "locale_ids",
    "locale_mappings",
    "mapping_rules",
    "names",
    "path_segments",
    "project_types",
    "qualified_doc_names",
    "resources",
    "text_flow_ids",
    "text_flows",
    "valid_rules",
    "xml_text",
]
