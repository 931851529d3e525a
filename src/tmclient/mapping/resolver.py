"""Translation file destination resolution.

Resolution order:
    1. User mapping rules, in declaration order. The first applicable rule
       wins; there is no ranking by specificity.
    2. The built-in default rule for the project type.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING

from tmclient.config.model import FileMappingRule
from tmclient.diagnostics import ConfigError, ErrorTemplate
from tmclient.enums import ProjectType
from tmclient.mapping.handler import FileMappingRuleHandler

if TYPE_CHECKING:
    from tmclient.config.model import LocaleMapping
    from tmclient.config.options import Options
    from tmclient.mapping.docname import QualifiedSrcDocName, UnqualifiedSrcDocName

__all__ = ["PROJECT_TYPE_FILE_MAPPING_RULES", "TransFileResolver", "default_rule_for"]

logger = logging.getLogger(__name__)

_PROPERTIES_STYLE = FileMappingRule("{path}/{filename}_{locale_with_underscore}.{extension}")

PROJECT_TYPE_FILE_MAPPING_RULES: Mapping[ProjectType, FileMappingRule] = MappingProxyType({
    ProjectType.FILE: FileMappingRule("{locale}/{path}/{filename}.{extension}"),
    ProjectType.GETTEXT: FileMappingRule("{path}/{locale_with_underscore}.po"),
    ProjectType.PODIR: FileMappingRule("{locale}/{path}/{filename}.po"),
    ProjectType.PROPERTIES: _PROPERTIES_STYLE,
    ProjectType.UTF8PROPERTIES: _PROPERTIES_STYLE,
    ProjectType.XLIFF: _PROPERTIES_STYLE,
    ProjectType.XML: _PROPERTIES_STYLE,
})
"""Built-in rule per project type, used when no user rule applies."""


def default_rule_for(
    project_type: ProjectType,
    rules: Mapping[ProjectType, FileMappingRule] = PROJECT_TYPE_FILE_MAPPING_RULES,
) -> FileMappingRule:
    """Look up the default rule for a project type.

    Raises:
        ConfigError: If the table has no rule for the project type
    """
    rule = rules.get(project_type)
    if rule is None:
        raise ConfigError(ErrorTemplate.no_default_mapping(str(project_type)))
    return rule


class TransFileResolver:
    """Resolve where the translation of a source document is stored.

    Tries the configured file mapping rules first, then falls back to the
    default rule for the project type. Paths are relative to the options'
    translation directory.

    Example:
        >>> opts = Options(project_type="properties", trans_dir=Path("l10n"))
        >>> resolver = TransFileResolver(opts)
        >>> resolver.resolve_trans_file(QualifiedSrcDocName("docs/readme.properties"),
        ...                             LocaleMapping("de-DE"))
        PosixPath('l10n/docs/readme_de_DE.properties')
    """

    __slots__ = ("_default_rules", "_opts")

    def __init__(
        self,
        opts: Options,
        default_rules: Mapping[ProjectType, FileMappingRule] = PROJECT_TYPE_FILE_MAPPING_RULES,
    ) -> None:
        self._opts = opts
        self._default_rules = default_rules

    @property
    def project_type(self) -> ProjectType:
        """Project type from the options.

        Raises:
            ConfigError: If unset or unknown
        """
        if not self._opts.project_type:
            raise ConfigError(ErrorTemplate.project_type_required())
        return ProjectType.from_name(self._opts.project_type)

    @property
    def _trans_dir(self) -> Path:
        return self._opts.trans_dir if self._opts.trans_dir is not None else Path(".")

    def resolve_trans_file(
        self, doc: QualifiedSrcDocName, locale_mapping: LocaleMapping
    ) -> Path:
        """Determine where to store the translation of a document.

        Args:
            doc: Source document name with extension
            locale_mapping: Target locale

        Returns:
            Translation file path under the translation directory

        Raises:
            ConfigError: If the project type is missing, unknown, or has no
                default rule when no user rule applies
        """
        project_type = self.project_type
        relative = self._from_project_rules(doc, locale_mapping, project_type)
        if relative is None:
            relative = self._from_default_rule(doc, locale_mapping, project_type)
        return self._trans_dir / relative

    def get_trans_file(
        self, doc: UnqualifiedSrcDocName, locale_mapping: LocaleMapping
    ) -> Path:
        """Like resolve_trans_file, for a document name without extension."""
        return self.resolve_trans_file(doc.to_qualified(self.project_type), locale_mapping)

    def _from_project_rules(
        self,
        doc: QualifiedSrcDocName,
        locale_mapping: LocaleMapping,
        project_type: ProjectType,
    ) -> str | None:
        for rule in self._opts.file_mapping_rules:
            handler = FileMappingRuleHandler(rule, project_type, self._opts.src_dir)
            if handler.is_applicable(doc):
                logger.debug("Rule %s applies to %s", rule.rule, doc.full_name)
                return handler.relative_trans_path(doc, locale_mapping)
        return None

    def _from_default_rule(
        self,
        doc: QualifiedSrcDocName,
        locale_mapping: LocaleMapping,
        project_type: ProjectType,
    ) -> str:
        rule = default_rule_for(project_type, self._default_rules)
        handler = FileMappingRuleHandler(rule, project_type, self._opts.src_dir)
        return handler.relative_trans_path(doc, locale_mapping)
