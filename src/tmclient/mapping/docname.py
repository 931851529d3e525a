"""Source document names.

A qualified name carries the file extension (``docs/readme.txt``); an
unqualified name does not (``docs/readme``). The server stores gettext,
properties and XML documents unqualified, so the project type supplies the
extension when resolving translation files.

Python 3.13+.
"""

from __future__ import annotations

import posixpath
from dataclasses import dataclass

from tmclient.diagnostics import ConfigError, ErrorTemplate
from tmclient.enums import ProjectType

__all__ = ["QualifiedSrcDocName", "UnqualifiedSrcDocName"]


@dataclass(frozen=True, slots=True)
class QualifiedSrcDocName:
    """Source document name including its extension.

    Attributes:
        full_name: Slash-separated path relative to the source directory
    """

    full_name: str

    def __post_init__(self) -> None:
        """Validate that the name has an extension.

        Raises:
            ValueError: If the file name has no extension
        """
        _, ext = posixpath.splitext(posixpath.basename(self.full_name))
        if not ext or ext == ".":
            msg = f"Qualified document name must have an extension: '{self.full_name}'"
            raise ValueError(msg)

    @property
    def extension(self) -> str:
        """Extension without the leading dot."""
        return posixpath.splitext(self.full_name)[1][1:]

    @property
    def path(self) -> str:
        """Directory part, empty for top-level documents."""
        return posixpath.dirname(self.full_name)

    @property
    def filename(self) -> str:
        """Base name without the extension."""
        return posixpath.splitext(posixpath.basename(self.full_name))[0]

    def to_unqualified(self) -> UnqualifiedSrcDocName:
        return UnqualifiedSrcDocName(posixpath.splitext(self.full_name)[0])


@dataclass(frozen=True, slots=True)
class UnqualifiedSrcDocName:
    """Source document name without an extension.

    Attributes:
        name: Slash-separated path relative to the source directory
    """

    name: str

    def to_qualified(self, project_type: ProjectType) -> QualifiedSrcDocName:
        """Append the source extension implied by the project type.

        Raises:
            ConfigError: For project types without a single source extension
        """
        match project_type:
            case ProjectType.GETTEXT | ProjectType.PODIR:
                extension = "pot"
            case ProjectType.PROPERTIES | ProjectType.UTF8PROPERTIES:
                extension = "properties"
            case ProjectType.XLIFF | ProjectType.XML:
                extension = "xml"
            case _:
                raise ConfigError(
                    ErrorTemplate.doc_name_unqualifiable(self.name, str(project_type))
                )
        return QualifiedSrcDocName(f"{self.name}.{extension}")
