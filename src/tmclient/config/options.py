"""Client options and layered configuration merge.

Options come from three sources, highest precedence first:

    1. Command line (explicit parameters)
    2. Project config file (XML, next to the sources)
    3. User config file (INI, in the home directory)

The merge is field by field: a lower source only fills fields every higher
source left unset. ``None`` and ``()`` count as unset, so list options
(includes, excludes, locales, hooks, rules) are replaced wholesale rather
than concatenated.

All functions return new Options; nothing is mutated.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import TYPE_CHECKING

from tmclient.config.console import StreamConsoleInteractor
from tmclient.config.mismatch import OptionMismatchChecker, is_unset
from tmclient.config.project import load_project_config
from tmclient.config.user import load_user_config
from tmclient.diagnostics import ConfigError, ErrorTemplate
from tmclient.mapping.validation import check_potential_mistakes_in_rules

if TYPE_CHECKING:
    from tmclient.config.console import ConsoleInteractor
    from tmclient.config.model import CommandHook, FileMappingRule, LocaleMapping, ProjectConfig
    from tmclient.config.user import UserConfig

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Options record
    "Options",
    # Merge
    "merge_options",
    "options_from_project_config",
    "apply_project_config",
    "apply_user_config",
    "apply_config_files",
    # Checks
    "check_mandatory_options",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Options:
    """Every configurable client option.

    ``None`` (or ``()`` for tuples) means "not set by this source".

    ``interactive_mode``, ``log_http`` and ``disable_ssl_cert`` can only be
    given on the command line; merging takes them from the first layer.
    """

    user_config: Path | None = None
    project_config: Path | None = None
    url: str | None = None
    username: str | None = None
    key: str | None = None
    project: str | None = None
    project_version: str | None = None
    project_type: str | None = None
    src_dir: Path | None = None
    trans_dir: Path | None = None
    includes: tuple[str, ...] = ()
    excludes: tuple[str, ...] = ()
    locales: tuple[LocaleMapping, ...] = ()
    command_hooks: tuple[CommandHook, ...] = ()
    file_mapping_rules: tuple[FileMappingRule, ...] = ()
    debug: bool | None = None
    errors: bool | None = None
    quiet: bool | None = None
    interactive_mode: bool = True
    log_http: bool = False
    disable_ssl_cert: bool = False

    def hooks_for(self, command: str) -> tuple[CommandHook, ...]:
        """Hooks attached to a command name."""
        return tuple(hook for hook in self.command_hooks if hook.command == command)


_FIRST_LAYER_FIELDS = frozenset({"interactive_mode", "log_http", "disable_ssl_cert"})


def merge_options(*layers: Options) -> Options:
    """Merge option layers, highest precedence first.

    For each field the first layer with a set value wins.

    Example:
        >>> cli = Options(url="https://cli/")
        >>> project = Options(url="https://project/", project="guide")
        >>> merged = merge_options(cli, project)
        >>> merged.url, merged.project
        ('https://cli/', 'guide')
    """
    if not layers:
        return Options()
    values: dict[str, object] = {}
    for option in fields(Options):
        name = option.name
        if name in _FIRST_LAYER_FIELDS:
            values[name] = getattr(layers[0], name)
            continue
        values[name] = getattr(layers[0], name)
        for layer in layers:
            value = getattr(layer, name)
            if not is_unset(value):
                values[name] = value
                break
    return Options(**values)  # type: ignore[arg-type]


def options_from_project_config(config: ProjectConfig) -> Options:
    """Options layer defined by a project config file."""
    return Options(
        url=config.url,
        project=config.project,
        project_version=config.project_version,
        project_type=config.project_type,
        src_dir=config.src_dir,
        trans_dir=config.trans_dir,
        includes=config.includes,
        excludes=config.excludes,
        locales=config.locales,
        command_hooks=config.hooks,
        file_mapping_rules=config.rules,
    )


def _check_directories_and_patterns(opts: Options, config: ProjectConfig) -> None:
    """Log hints and mismatch warnings for options shared with the config."""
    checks = (
        (OptionMismatchChecker(opts.src_dir, config.src_dir, "Source directory"),
         f"<src-dir>{opts.src_dir}</src-dir>"),
        (OptionMismatchChecker(opts.trans_dir, config.trans_dir, "Translation directory"),
         f"<trans-dir>{opts.trans_dir}</trans-dir>"),
        (OptionMismatchChecker(opts.includes, config.includes, "Includes"),
         f"<includes>{','.join(opts.includes)}</includes>"),
        (OptionMismatchChecker(opts.excludes, config.excludes, "Excludes"),
         f"<excludes>{','.join(opts.excludes)}</excludes>"),
    )
    for checker, suggestion in checks:
        if checker.has_value_in_config_only:
            logger.debug("%s taken from project config", checker.description)
        checker.log_hint_if_not_defined_in_config(suggestion)
        checker.log_warning_if_values_mismatch()


def apply_project_config(
    opts: Options,
    config: ProjectConfig,
    console: ConsoleInteractor | None = None,
) -> Options:
    """Fill options not set on the command line from the project config.

    Mapping rules of the result are validated afterwards.

    Raises:
        InvalidMappingRuleError: If a mapping rule has no locale placeholder
        UserAbortError: If the user rejects suspicious rules interactively
    """
    _check_directories_and_patterns(opts, config)
    merged = merge_options(opts, options_from_project_config(config))
    if merged.file_mapping_rules:
        check_potential_mistakes_in_rules(
            merged.file_mapping_rules,
            console if console is not None else StreamConsoleInteractor(),
            interactive=merged.interactive_mode,
        )
    return merged


def apply_user_config(opts: Options, config: UserConfig) -> Options:
    """Fill options not set elsewhere from the user config.

    Credentials are looked up only when username or key is missing and the
    server URL is known.
    """
    layer = Options(debug=config.debug, errors=config.errors, quiet=config.quiet)
    if (opts.username is None or opts.key is None) and opts.url is not None:
        credentials = config.credentials_for(opts.url)
        if credentials is not None:
            layer = replace(layer, username=credentials.username, key=credentials.key)
        else:
            logger.debug("No [servers] entry in user config matches %s", opts.url)
    return merge_options(opts, layer)


def apply_config_files(
    opts: Options,
    console: ConsoleInteractor | None = None,
) -> Options:
    """Apply the project config, then the user config, then defaults.

    Missing config files are logged and skipped.

    Raises:
        ConfigError: If a config file exists but is malformed
    """
    if opts.project_config is not None:
        if opts.project_config.exists():
            opts = apply_project_config(opts, load_project_config(opts.project_config), console)
        else:
            logger.warning("Project config file '%s' not found; ignoring.", opts.project_config)

    if opts.user_config is not None:
        if opts.user_config.exists():
            opts = apply_user_config(opts, load_user_config(opts.user_config))
        else:
            logger.warning("User config file '%s' not found; ignoring.", opts.user_config)

    return merge_options(opts, Options(src_dir=Path("."), trans_dir=Path(".")))


def check_mandatory_options(opts: Options) -> None:
    """Ensure options required to talk to the server are present.

    Raises:
        ConfigError: If url, username or key is missing
    """
    if opts.url is None:
        raise ConfigError(ErrorTemplate.url_required())
    if opts.username is None:
        raise ConfigError(ErrorTemplate.username_required())
    if opts.key is None:
        raise ConfigError(ErrorTemplate.api_key_required())
    if opts.disable_ssl_cert:
        logger.warning(
            "SSL certificate verification will be disabled. "
            "You should consider adding the certificate instead of disabling it."
        )
