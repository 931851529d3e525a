"""Configuration value types.

Immutable records built from the project config file, the user config file
or the command line. All are frozen slotted dataclasses and are discarded
after a single command run.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

__all__ = [
    "CommandHook",
    "FileMappingRule",
    "LocaleMapping",
    "ProjectConfig",
]


@dataclass(frozen=True, slots=True)
class FileMappingRule:
    """Template deciding where a translated document is written.

    Attributes:
        rule: Path template with placeholders, e.g.
            ``"{path}/{filename}_{locale_with_underscore}.{extension}"``
        pattern: Optional glob limiting which source documents the rule
            applies to. Without a pattern the rule applies to every document
            of the project type.
    """

    rule: str
    pattern: str | None = None


@dataclass(frozen=True, slots=True)
class LocaleMapping:
    """Association between a server locale and its on-disk spelling.

    Attributes:
        locale: Locale id as known by the server (e.g. ``"zh-Hans"``)
        map_from: Local spelling used in file names (e.g. ``"zh_CN"``).
            None when it equals the server locale.
    """

    locale: str
    map_from: str | None = None

    @property
    def local_locale(self) -> str:
        """Locale as it appears in local file and directory names."""
        return self.map_from or self.locale


@dataclass(frozen=True, slots=True)
class CommandHook:
    """Shell commands run around a client command.

    Attributes:
        command: Name of the client command this hook is attached to
        before: Commands run before the client command, in order
        after: Commands run after the client command succeeds, in order
    """

    command: str
    before: tuple[str, ...] = ()
    after: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class ProjectConfig:
    """Contents of a project config file.

    Every field is optional; None (or an empty tuple) means the file does
    not define it.
    """

    url: str | None = None
    project: str | None = None
    project_version: str | None = None
    project_type: str | None = None
    src_dir: Path | None = None
    trans_dir: Path | None = None
    includes: tuple[str, ...] = ()
    excludes: tuple[str, ...] = ()
    locales: tuple[LocaleMapping, ...] = ()
    hooks: tuple[CommandHook, ...] = ()
    rules: tuple[FileMappingRule, ...] = ()
