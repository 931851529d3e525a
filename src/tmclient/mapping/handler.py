"""Application of a single file mapping rule.

Python 3.13+.
"""

from __future__ import annotations

import logging
import posixpath
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING

from tmclient.locale_utils import to_underscore
from tmclient.mapping.placeholders import Placeholder

if TYPE_CHECKING:
    from tmclient.config.model import FileMappingRule, LocaleMapping
    from tmclient.enums import ProjectType
    from tmclient.mapping.docname import QualifiedSrcDocName

__all__ = ["FileMappingRuleHandler"]

logger = logging.getLogger(__name__)


class FileMappingRuleHandler:
    """Decides whether a rule applies to a document and expands it.

    Stateless apart from its constructor arguments; one handler is created
    per rule and resolution.

    Attributes:
        mapping_rule: The rule to apply
        project_type: Project type of the documents
        src_dir: Source directory, used when matching rule patterns
    """

    __slots__ = ("mapping_rule", "project_type", "src_dir")

    def __init__(
        self,
        mapping_rule: FileMappingRule,
        project_type: ProjectType,
        src_dir: Path | None = None,
    ) -> None:
        self.mapping_rule = mapping_rule
        self.project_type = project_type
        self.src_dir = src_dir

    def is_applicable(self, doc: QualifiedSrcDocName) -> bool:
        """Check whether this rule applies to a source document.

        With a pattern, the document name is glob-matched (``**`` spans
        directories), both as given and prefixed with the source directory,
        so ``**/*.odt`` matches a top-level ``test.odt``. Without a pattern,
        the extension must belong to the project type.
        """
        pattern = self.mapping_rule.pattern
        if not pattern:
            return doc.extension in self.project_type.source_extensions

        candidates = [PurePosixPath(doc.full_name)]
        if self.src_dir is not None:
            candidates.append(PurePosixPath(self.src_dir.as_posix(), doc.full_name))
            candidates.append(PurePosixPath(Path(self.src_dir, doc.full_name).absolute().as_posix()))
        return any(candidate.full_match(pattern) for candidate in candidates)

    def placeholder_values(
        self, doc: QualifiedSrcDocName, locale_mapping: LocaleMapping
    ) -> dict[Placeholder, str]:
        """Values substituted for each placeholder."""
        local_locale = locale_mapping.local_locale
        return {
            Placeholder.PATH: doc.path,
            Placeholder.FILENAME: doc.filename,
            Placeholder.EXTENSION: doc.extension,
            Placeholder.LOCALE: local_locale,
            Placeholder.LOCALE_WITH_UNDERSCORE: to_underscore(local_locale),
        }

    def relative_trans_path(
        self, doc: QualifiedSrcDocName, locale_mapping: LocaleMapping
    ) -> str:
        """Expand the rule for a document and locale.

        The result is normalized: empty path segments produced by an empty
        ``{path}`` collapse, and it never starts with ``/`` or ``./``.

        Example:
            ``{path}/{filename}_{locale_with_underscore}.{extension}`` for
            ``docs/readme.txt`` and ``de-DE`` gives ``docs/readme_de_DE.txt``.
        """
        trans_path = self.mapping_rule.rule
        for placeholder, value in self.placeholder_values(doc, locale_mapping).items():
            trans_path = trans_path.replace(placeholder, value)
        normalized = posixpath.normpath(trans_path).lstrip("/")
        logger.debug("Rule %s expanded to %s", self.mapping_rule.rule, normalized)
        return normalized
