"""Translation file path resolution.

Components:
    TransFileResolver - User rules first, then the project type default
    FileMappingRuleHandler - Applicability and expansion of one rule
    QualifiedSrcDocName / UnqualifiedSrcDocName - Source document names
    Placeholder - Tokens recognized in rule templates
    check_potential_mistakes_in_rules - Rule validation with confirmation

Python 3.13+.
"""

from .docname import QualifiedSrcDocName, UnqualifiedSrcDocName
from .handler import FileMappingRuleHandler
from .placeholders import (
    Placeholder,
    all_holders,
    is_rule_valid,
    rule_may_have_problem,
    strip_valid_holders,
)
from .resolver import PROJECT_TYPE_FILE_MAPPING_RULES, TransFileResolver, default_rule_for
from .validation import check_potential_mistakes_in_rules, validate_rules

__all__ = [
    "PROJECT_TYPE_FILE_MAPPING_RULES",
    "FileMappingRuleHandler",
    "Placeholder",
    "QualifiedSrcDocName",
    "TransFileResolver",
    "UnqualifiedSrcDocName",
    "all_holders",
    "check_potential_mistakes_in_rules",
    "default_rule_for",
    "is_rule_valid",
    "rule_may_have_problem",
    "strip_valid_holders",
    "validate_rules",
]
