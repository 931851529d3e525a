"""Validation of user file mapping rules.

Runs when the project config is applied, before any path is resolved:

- A rule without ``{locale}`` or ``{locale_with_underscore}`` is invalid;
  every invalid rule is reported, then InvalidMappingRuleError aborts.
- A rule with leftover ``{`` or ``}`` after removing known placeholders is
  suspicious (probably a misspelt placeholder). Suspicious rules only warn;
  in interactive mode the user must confirm before continuing.

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tmclient.diagnostics import (
    ErrorTemplate,
    InvalidMappingRuleError,
    ValidationError,
    ValidationResult,
    ValidationWarning,
)
from tmclient.enums import DisplayMode
from tmclient.mapping.placeholders import is_rule_valid, rule_may_have_problem

if TYPE_CHECKING:
    from collections.abc import Sequence

    from tmclient.config.console import ConsoleInteractor
    from tmclient.config.model import FileMappingRule

__all__ = ["check_potential_mistakes_in_rules", "validate_rules"]

logger = logging.getLogger(__name__)


def validate_rules(rules: Sequence[FileMappingRule]) -> ValidationResult:
    """Classify mapping rules without side effects.

    Returns:
        ValidationResult with one error per invalid rule and one warning per
        suspicious rule
    """
    errors: list[ValidationError] = []
    warnings: list[ValidationWarning] = []
    for mapping_rule in rules:
        rule = mapping_rule.rule
        if not is_rule_valid(rule):
            errors.append(
                ValidationError(
                    code="invalid-rule",
                    message=ErrorTemplate.invalid_rule(rule).message,
                    content=rule,
                )
            )
        if rule_may_have_problem(rule):
            warnings.append(
                ValidationWarning(
                    code="unrecognized-variables",
                    message=ErrorTemplate.unrecognized_variables(rule).message,
                    context=rule,
                )
            )
    return ValidationResult(errors=tuple(errors), warnings=tuple(warnings))


def check_potential_mistakes_in_rules(
    rules: Sequence[FileMappingRule],
    console: ConsoleInteractor,
    *,
    interactive: bool,
) -> ValidationResult:
    """Report rule problems to the console and enforce validity.

    Args:
        rules: User mapping rules in declaration order
        console: Where warnings are printed and confirmation is read
        interactive: Whether to ask for confirmation on suspicious rules

    Returns:
        The ValidationResult (warnings only; errors raise)

    Raises:
        InvalidMappingRuleError: If any rule is invalid
        UserAbortError: If the user declines to continue past warnings
    """
    result = validate_rules(rules)
    for error in result.errors:
        console.printfln(DisplayMode.WARNING, error.message)
    for warning in result.warnings:
        console.printfln(DisplayMode.WARNING, warning.message)

    if not result.is_valid:
        invalid = tuple(error.content for error in result.errors)
        raise InvalidMappingRuleError(ErrorTemplate.invalid_rules(invalid), rules=invalid)

    if result.warnings:
        logger.warning("%d file mapping rule(s) may be misspelt", result.warning_count)
        if interactive:
            console.printfln(
                DisplayMode.QUESTION,
                "Are you sure the mapping rules are correct? (y/n)",
            )
            console.expect_yes()
    return result
