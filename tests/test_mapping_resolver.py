"""Tests for TransFileResolver and the default rule table."""

from pathlib import Path
from types import MappingProxyType

import pytest
from hypothesis import given
from hypothesis import strategies as st

from tmclient.config.model import FileMappingRule, LocaleMapping
from tmclient.config.options import Options
from tmclient.diagnostics import ConfigError, DiagnosticCode
from tmclient.enums import ProjectType
from tmclient.mapping.docname import QualifiedSrcDocName, UnqualifiedSrcDocName
from tmclient.mapping.handler import FileMappingRuleHandler
from tmclient.mapping.resolver import (
    PROJECT_TYPE_FILE_MAPPING_RULES,
    TransFileResolver,
    default_rule_for,
)
from tests.strategies import locale_mappings, project_types, qualified_doc_names, valid_rules

DE = LocaleMapping("de-DE")


class TestDefaultRules:
    """The built-in rule table."""

    @given(project_type=project_types)
    def test_every_project_type_has_default(self, project_type: ProjectType) -> None:
        rule = default_rule_for(project_type)
        assert rule.pattern is None
        assert rule.rule

    def test_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            PROJECT_TYPE_FILE_MAPPING_RULES[ProjectType.FILE] = FileMappingRule("{locale}")  # type: ignore[index]

    def test_missing_default_raises(self) -> None:
        table = MappingProxyType({ProjectType.FILE: FileMappingRule("{locale}/{filename}")})
        with pytest.raises(ConfigError) as exc_info:
            default_rule_for(ProjectType.XLIFF, table)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.NO_DEFAULT_MAPPING

    @pytest.mark.parametrize(
        ("project_type", "doc", "expected"),
        [
            (ProjectType.FILE, "docs/readme.txt", "de-DE/docs/readme.txt"),
            (ProjectType.GETTEXT, "po/messages.pot", "po/de_DE.po"),
            (ProjectType.PODIR, "po/messages.pot", "de-DE/po/messages.po"),
            (ProjectType.PROPERTIES, "res/app.properties", "res/app_de_DE.properties"),
            (ProjectType.UTF8PROPERTIES, "res/app.properties", "res/app_de_DE.properties"),
            (ProjectType.XLIFF, "res/app.xml", "res/app_de_DE.xml"),
            (ProjectType.XML, "res/app.xml", "res/app_de_DE.xml"),
        ],
    )
    def test_default_expansion(self, project_type: ProjectType, doc: str, expected: str) -> None:
        resolver = TransFileResolver(Options(project_type=project_type.value))
        assert resolver.resolve_trans_file(QualifiedSrcDocName(doc), DE) == Path(expected)

    @given(project_type=project_types, doc=qualified_doc_names(), locale=locale_mappings())
    def test_no_user_rules_uses_default_template(
        self, project_type: ProjectType, doc: QualifiedSrcDocName, locale: LocaleMapping
    ) -> None:
        resolver = TransFileResolver(Options(project_type=project_type.value))
        handler = FileMappingRuleHandler(default_rule_for(project_type), project_type)
        assert resolver.resolve_trans_file(doc, locale) == Path(handler.relative_trans_path(doc, locale))


class TestUserRules:
    """User rules take precedence in declaration order."""

    def test_readme_example(self) -> None:
        opts = Options(
            project_type="file",
            file_mapping_rules=(
                FileMappingRule("{path}/{filename}_{locale_with_underscore}.{extension}", "**/*.txt"),
            ),
        )
        resolver = TransFileResolver(opts)
        assert resolver.resolve_trans_file(QualifiedSrcDocName("docs/readme.txt"), DE) == Path(
            "docs/readme_de_DE.txt"
        )

    def test_matching_user_rule_beats_default(self) -> None:
        opts = Options(
            project_type="podir",
            file_mapping_rules=(FileMappingRule("translations/{locale_with_underscore}/{filename}.po"),),
        )
        result = TransFileResolver(opts).resolve_trans_file(QualifiedSrcDocName("po/messages.pot"), DE)
        assert result == Path("translations/de_DE/messages.po")

    def test_non_matching_user_rule_falls_back_to_default(self) -> None:
        opts = Options(
            project_type="file",
            file_mapping_rules=(FileMappingRule("{locale}/{filename}.odt", "**/*.odt"),),
        )
        result = TransFileResolver(opts).resolve_trans_file(QualifiedSrcDocName("docs/readme.txt"), DE)
        assert result == Path("de-DE/docs/readme.txt")

    def test_first_declared_rule_wins(self) -> None:
        """No specificity ranking: a broad first rule shadows a narrower second one."""
        opts = Options(
            project_type="file",
            file_mapping_rules=(
                FileMappingRule("first/{locale}/{filename}.{extension}", "**/*"),
                FileMappingRule("second/{locale}/{filename}.{extension}", "docs/*.txt"),
            ),
        )
        result = TransFileResolver(opts).resolve_trans_file(QualifiedSrcDocName("docs/readme.txt"), DE)
        assert result == Path("first/de-DE/readme.txt")

    @given(
        rules=st.lists(valid_rules(), min_size=1, max_size=4),
        doc=qualified_doc_names(extension=st.just("pot")),
        locale=locale_mappings(),
    )
    def test_first_applicable_rule_in_declaration_order(
        self, rules: list[str], doc: QualifiedSrcDocName, locale: LocaleMapping
    ) -> None:
        mapping_rules = tuple(FileMappingRule(rule) for rule in rules)
        opts = Options(project_type="gettext", file_mapping_rules=mapping_rules)
        expected = FileMappingRuleHandler(mapping_rules[0], ProjectType.GETTEXT).relative_trans_path(doc, locale)
        assert TransFileResolver(opts).resolve_trans_file(doc, locale) == Path(expected)


class TestResolverOptions:
    """Options the resolver reads."""

    def test_trans_dir_prefix(self) -> None:
        opts = Options(project_type="gettext", trans_dir=Path("build/l10n"))
        result = TransFileResolver(opts).resolve_trans_file(QualifiedSrcDocName("po/messages.pot"), DE)
        assert result == Path("build/l10n/po/de_DE.po")

    def test_missing_project_type(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            TransFileResolver(Options()).resolve_trans_file(QualifiedSrcDocName("a.txt"), DE)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.PROJECT_TYPE_REQUIRED

    def test_unknown_project_type(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            TransFileResolver(Options(project_type="docbook")).resolve_trans_file(
                QualifiedSrcDocName("a.xml"), DE
            )
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.PROJECT_TYPE_UNKNOWN

    def test_project_type_name_is_case_insensitive(self) -> None:
        assert TransFileResolver(Options(project_type="GetText")).project_type is ProjectType.GETTEXT

    def test_get_trans_file_qualifies_name(self) -> None:
        resolver = TransFileResolver(Options(project_type="properties"))
        result = resolver.get_trans_file(UnqualifiedSrcDocName("res/app"), LocaleMapping("pt-BR"))
        assert result == Path("res/app_pt_BR.properties")

    def test_custom_default_table(self) -> None:
        table = MappingProxyType({ProjectType.GETTEXT: FileMappingRule("all/{locale}.po")})
        resolver = TransFileResolver(Options(project_type="gettext"), default_rules=table)
        assert resolver.resolve_trans_file(QualifiedSrcDocName("po/x.pot"), DE) == Path("all/de-DE.po")
