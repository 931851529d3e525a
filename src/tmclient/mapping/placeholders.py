"""File mapping rule placeholders.

A mapping rule is a path template such as
``{locale}/{path}/{filename}.{extension}``. Each placeholder is replaced
with a value derived from the source document name or the locale mapping.

Python 3.13+.
"""

from enum import StrEnum

__all__ = [
    "Placeholder",
    "all_holders",
    "is_rule_valid",
    "rule_may_have_problem",
    "strip_valid_holders",
]


class Placeholder(StrEnum):
    """Recognized placeholders in a file mapping rule.

    The value is the literal token as written in the rule.
    """

    PATH = "{path}"
    """Directory of the source document, e.g. ``foo/bar``"""

    FILENAME = "{filename}"
    """Source document name without directory and extension"""

    EXTENSION = "{extension}"
    """Source document extension without the dot"""

    LOCALE = "{locale}"
    """Local locale id, e.g. ``de-DE``"""

    LOCALE_WITH_UNDERSCORE = "{locale_with_underscore}"
    """Local locale id with hyphens replaced by underscores, e.g. ``de_DE``"""


def all_holders() -> str:
    """Comma-separated list of all placeholders, for messages."""
    return ", ".join(Placeholder)


def strip_valid_holders(rule: str) -> str:
    """Remove every recognized placeholder from a rule.

    Example:
        >>> strip_valid_holders("{locale}/{path}/{fileName}.po")
        '//{fileName}.po'
    """
    for placeholder in Placeholder:
        rule = rule.replace(placeholder, "")
    return rule


def is_rule_valid(rule: str) -> bool:
    """A rule must mention the locale, or every locale writes the same file."""
    return Placeholder.LOCALE in rule or Placeholder.LOCALE_WITH_UNDERSCORE in rule


def rule_may_have_problem(rule: str) -> bool:
    """True if braces remain after stripping known placeholders.

    Usually a misspelt placeholder such as ``{fileName}``.
    """
    remains = strip_valid_holders(rule)
    return "{" in remains or "}" in remains
