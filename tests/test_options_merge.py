"""Tests for layered option merging and config file application."""

import logging
from dataclasses import fields
from pathlib import Path
from unittest.mock import Mock

import pytest
from hypothesis import given
from hypothesis import strategies as st

from tmclient.config.model import CommandHook, FileMappingRule, LocaleMapping, ProjectConfig
from tmclient.config.options import (
    Options,
    apply_config_files,
    apply_project_config,
    apply_user_config,
    check_mandatory_options,
    merge_options,
    options_from_project_config,
)
from tmclient.config.user import parse_user_config
from tmclient.diagnostics import ConfigError, DiagnosticCode, InvalidMappingRuleError

_urls = st.none() | st.sampled_from(["https://cli/", "https://project/", "https://user/"])
_names = st.none() | st.from_regex(r"[a-z]{1,6}", fullmatch=True)
_flags = st.none() | st.booleans()


@st.composite
def option_layers(draw: st.DrawFn) -> Options:
    """Options with a random subset of fields set."""
    return Options(
        url=draw(_urls),
        username=draw(_names),
        key=draw(_names),
        project=draw(_names),
        project_type=draw(st.none() | st.sampled_from(["file", "gettext", "podir"])),
        src_dir=draw(st.none() | _names.filter(bool).map(Path)),
        includes=draw(st.lists(_names.filter(bool), max_size=2).map(tuple)),
        locales=draw(st.lists(st.sampled_from(["de", "fr"]).map(LocaleMapping), max_size=2).map(tuple)),
        debug=draw(_flags),
        quiet=draw(_flags),
    )


def _is_set(value: object) -> bool:
    return value is not None and value != ()


class TestMergeOptions:
    """merge_options: first layer with a set value wins, field by field."""

    def test_doc_example(self) -> None:
        merged = merge_options(Options(url="https://cli/"), Options(url="https://project/", project="guide"))
        assert merged.url == "https://cli/"
        assert merged.project == "guide"

    def test_no_layers(self) -> None:
        assert merge_options() == Options()

    def test_false_is_a_set_value(self) -> None:
        merged = merge_options(Options(debug=False), Options(debug=True))
        assert merged.debug is False

    def test_lists_are_replaced_not_concatenated(self) -> None:
        merged = merge_options(Options(includes=("a",)), Options(includes=("b", "c")))
        assert merged.includes == ("a",)

    def test_command_line_only_fields_come_from_first_layer(self) -> None:
        merged = merge_options(
            Options(interactive_mode=True, log_http=False),
            Options(interactive_mode=False, log_http=True, disable_ssl_cert=True),
        )
        assert merged.interactive_mode is True
        assert merged.log_http is False
        assert merged.disable_ssl_cert is False

    @given(cli=option_layers(), project=option_layers(), user=option_layers())
    def test_precedence(self, cli: Options, project: Options, user: Options) -> None:
        """A field set in a higher layer is never overwritten by a lower one."""
        merged = merge_options(cli, project, user)
        for option in fields(Options):
            name = option.name
            expected = next(
                (getattr(layer, name) for layer in (cli, project, user) if _is_set(getattr(layer, name))),
                getattr(cli, name),
            )
            assert getattr(merged, name) == expected

    @given(cli=option_layers(), project=option_layers())
    def test_two_layer_precedence(self, cli: Options, project: Options) -> None:
        merged = merge_options(cli, project)
        if _is_set(cli.url):
            assert merged.url == cli.url
        if not _is_set(cli.url):
            assert merged.url == project.url

    def test_hooks_for(self) -> None:
        hooks = (CommandHook("pull", before=("a",)), CommandHook("push"), CommandHook("pull", after=("b",)))
        opts = Options(command_hooks=hooks)
        assert opts.hooks_for("pull") == (hooks[0], hooks[2])
        assert opts.hooks_for("glossary-push") == ()


class TestApplyProjectConfig:
    """Project config fills what the command line leaves unset."""

    CONFIG = ProjectConfig(
        url="https://project/",
        project="guide",
        project_type="gettext",
        src_dir=Path("po"),
        locales=(LocaleMapping("de"),),
        rules=(FileMappingRule("{path}/{locale_with_underscore}.po"),),
    )

    def test_fills_unset_fields(self) -> None:
        merged = apply_project_config(Options(), self.CONFIG, Mock())
        assert merged.url == "https://project/"
        assert merged.project_type == "gettext"
        assert merged.locales == (LocaleMapping("de"),)
        assert merged.file_mapping_rules == self.CONFIG.rules

    def test_command_line_wins_and_mismatch_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            merged = apply_project_config(Options(src_dir=Path("other")), self.CONFIG, Mock())
        assert merged.src_dir == Path("other")
        assert "Source directory" in caplog.text

    def test_hint_when_config_lacks_option(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO):
            apply_project_config(Options(trans_dir=Path("out")), self.CONFIG, Mock())
        assert "<trans-dir>out</trans-dir>" in caplog.text

    def test_config_only_value_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="tmclient.config.options"):
            merged = apply_project_config(Options(), self.CONFIG, Mock())
        assert merged.src_dir == Path("po")
        messages = [record.getMessage() for record in caplog.records if record.name == "tmclient.config.options"]
        assert messages == ["Source directory taken from project config"]

    def test_invalid_rule_raises(self) -> None:
        config = ProjectConfig(rules=(FileMappingRule("{path}/{filename}.po"),))
        with pytest.raises(InvalidMappingRuleError):
            apply_project_config(Options(), config, Mock())

    def test_suspicious_rule_confirmed_in_interactive_mode(self) -> None:
        console = Mock()
        config = ProjectConfig(rules=(FileMappingRule("{locale}/{fileName}.po"),))
        apply_project_config(Options(interactive_mode=True), config, console)
        console.expect_yes.assert_called_once_with()

    def test_suspicious_rule_not_confirmed_in_batch_mode(self) -> None:
        console = Mock()
        config = ProjectConfig(rules=(FileMappingRule("{locale}/{fileName}.po"),))
        apply_project_config(Options(interactive_mode=False), config, console)
        console.expect_yes.assert_not_called()

    def test_options_from_project_config_maps_hooks(self) -> None:
        hook = CommandHook("pull", before=("ls",))
        assert options_from_project_config(ProjectConfig(hooks=(hook,))).command_hooks == (hook,)


class TestApplyUserConfig:
    """User config supplies defaults and credentials."""

    USER = parse_user_config(
        "[defaults]\nquiet = true\n\n[servers]\np.url = https://tm/\np.username = jdoe\np.key = secret\n"
    )

    def test_credentials_by_url(self) -> None:
        merged = apply_user_config(Options(url="https://tm"), self.USER)
        assert merged.username == "jdoe"
        assert merged.key == "secret"
        assert merged.quiet is True

    def test_explicit_credentials_win(self) -> None:
        merged = apply_user_config(Options(url="https://tm/", username="cli", key="k"), self.USER)
        assert (merged.username, merged.key) == ("cli", "k")

    def test_partial_credentials_filled(self) -> None:
        merged = apply_user_config(Options(url="https://tm/", username="cli"), self.USER)
        assert (merged.username, merged.key) == ("cli", "secret")

    def test_no_url_no_lookup(self) -> None:
        merged = apply_user_config(Options(), self.USER)
        assert merged.username is None

    def test_command_line_flag_wins(self) -> None:
        assert apply_user_config(Options(quiet=False), self.USER).quiet is False


class TestApplyConfigFiles:
    """Whole-file application order and defaults."""

    def test_missing_files_are_skipped(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        opts = Options(project_config=tmp_path / "none.xml", user_config=tmp_path / "none.ini")
        with caplog.at_level(logging.WARNING):
            merged = apply_config_files(opts)
        assert merged.src_dir == Path(".")
        assert merged.trans_dir == Path(".")
        assert caplog.text.count("not found") == 2

    def test_project_then_user(self, tmp_path: Path) -> None:
        project = tmp_path / "tmclient.xml"
        project.write_text(
            "<config><url>https://tm.example.com</url><project-type>file</project-type>"
            "<trans-dir>l10n</trans-dir></config>",
            encoding="utf-8",
        )
        user = tmp_path / "tmclient.ini"
        user.write_text(
            "[servers]\nex.url = https://tm.example.com/\nex.username = jdoe\nex.key = k1\n",
            encoding="utf-8",
        )
        merged = apply_config_files(Options(project_config=project, user_config=user), Mock())
        assert merged.url == "https://tm.example.com"
        assert merged.username == "jdoe"
        assert merged.key == "k1"
        assert merged.trans_dir == Path("l10n")
        assert merged.src_dir == Path(".")

    def test_malformed_project_config(self, tmp_path: Path) -> None:
        project = tmp_path / "tmclient.xml"
        project.write_text("<config>", encoding="utf-8")
        with pytest.raises(ConfigError):
            apply_config_files(Options(project_config=project))


class TestCheckMandatoryOptions:
    """url, username and key are required to talk to the server."""

    @pytest.mark.parametrize(
        ("opts", "code"),
        [
            (Options(username="u", key="k"), DiagnosticCode.URL_REQUIRED),
            (Options(url="https://tm/", key="k"), DiagnosticCode.USERNAME_REQUIRED),
            (Options(url="https://tm/", username="u"), DiagnosticCode.API_KEY_REQUIRED),
        ],
    )
    def test_missing(self, opts: Options, code: DiagnosticCode) -> None:
        with pytest.raises(ConfigError) as exc_info:
            check_mandatory_options(opts)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is code

    def test_complete(self) -> None:
        check_mandatory_options(Options(url="https://tm/", username="u", key="k"))

    def test_disabled_ssl_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            check_mandatory_options(Options(url="https://tm/", username="u", key="k", disable_ssl_cert=True))
        assert "SSL certificate verification will be disabled" in caplog.text
