"""Enumerations for tmclient type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum

from tmclient.diagnostics import ConfigError, ErrorTemplate

# Source document extensions for generic file projects.
_FILE_PROJECT_EXTENSIONS: frozenset[str] = frozenset({
    "txt", "dtd", "html", "htm", "idml", "srt", "sbt", "sub", "vtt",
    "odt", "fodt", "ods", "fods", "odp", "fodp", "odg", "fodg", "odb",
})


class ProjectType(StrEnum):
    """Classification of a source project's file format.

    Drives the default file mapping rule and which documents a pattern-less
    mapping rule applies to.

    StrEnum provides automatic string conversion: str(ProjectType.PODIR) == "podir"
    """

    FILE = "file"
    """Arbitrary documents, one file per locale directory"""

    GETTEXT = "gettext"
    """One .pot template with sibling <locale>.po files"""

    PODIR = "podir"
    """Many .pot templates with one directory per locale"""

    PROPERTIES = "properties"
    """Java properties (ISO-8859-1 with escapes)"""

    UTF8PROPERTIES = "utf8properties"
    """Java properties encoded as UTF-8"""

    XLIFF = "xliff"
    """XLIFF 1.1 documents"""

    XML = "xml"
    """Resource XML documents"""

    @classmethod
    def from_name(cls, name: str) -> "ProjectType":
        """Look up a project type by name, ignoring case.

        Raises:
            ConfigError: If name is not a known project type
        """
        try:
            return cls(name.strip().lower())
        except ValueError:
            known = tuple(member.value for member in cls)
            raise ConfigError(ErrorTemplate.project_type_unknown(name, known)) from None

    @property
    def source_extensions(self) -> frozenset[str]:
        """Extensions of source documents for this project type."""
        match self:
            case ProjectType.GETTEXT | ProjectType.PODIR:
                return frozenset({"pot"})
            case ProjectType.PROPERTIES | ProjectType.UTF8PROPERTIES:
                return frozenset({"properties"})
            case ProjectType.XLIFF | ProjectType.XML:
                return frozenset({"xml"})
            case _:
                return _FILE_PROJECT_EXTENSIONS


class DisplayMode(StrEnum):
    """How a console message is presented to the user.

    StrEnum provides automatic string conversion: str(DisplayMode.WARNING) == "warning"
    """

    QUESTION = "question"
    """A prompt awaiting an answer"""

    WARNING = "warning"
    """Something suspicious the user should look at"""

    INFORMATION = "information"
    """Plain progress output"""

    CONFIRMATION = "confirmation"
    """Echo of an accepted answer"""


class HookPhase(StrEnum):
    """When a command hook runs relative to its command."""

    BEFORE = "before"
    AFTER = "after"


__all__ = [
    "DisplayMode",
    "HookPhase",
    "ProjectType",
]
