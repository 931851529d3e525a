"""Comparison of an option value against the project config value.

Used when a directory or list option can come from both the command line
and the project config file. The command line wins; the checker decides
whether the config value should be applied and logs hints and warnings.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

__all__ = ["OptionMismatchChecker", "is_unset"]

logger = logging.getLogger(__name__)


def is_unset(value: object) -> bool:
    """True for None and for empty tuples (list options left unset)."""
    return value is None or value == ()


@dataclass(frozen=True, slots=True)
class OptionMismatchChecker[T]:
    """Pair of option value and project config value for one option.

    Attributes:
        option_value: Value from the command line (highest precedence)
        config_value: Value from the project config file
        description: Human-readable option name for log messages
    """

    option_value: T | None
    config_value: T | None
    description: str

    @property
    def has_value_in_config_only(self) -> bool:
        """True if only the project config supplies a value."""
        return is_unset(self.option_value) and not is_unset(self.config_value)

    def log_hint_if_not_defined_in_config(self, suggestion: str) -> None:
        """Suggest adding the option to the project config.

        Logged only when the command line provides a value the config lacks.
        """
        if not is_unset(self.option_value) and is_unset(self.config_value):
            logger.info(
                "%s is not defined in project config. You can add %s to it",
                self.description,
                suggestion,
            )

    def log_warning_if_values_mismatch(self) -> None:
        """Warn when command line and config disagree; the command line wins."""
        if (
            not is_unset(self.option_value)
            and not is_unset(self.config_value)
            and self.option_value != self.config_value
        ):
            logger.warning(
                "%s option value %s does not match project config value %s; using %s",
                self.description,
                self.option_value,
                self.config_value,
                self.option_value,
            )
