"""Client configuration: option records, config files and layered merge.

Components:
    Options - Every configurable option, immutable
    merge_options - Field-by-field precedence merge
    apply_config_files - Project config, then user config, then defaults
    ProjectConfig / load_project_config - XML project config
    UserConfig / load_user_config - INI user config
    ConsoleInteractor - Confirmation prompts

Python 3.13+.
"""

from .console import ConsoleInteractor, StreamConsoleInteractor
from .mismatch import OptionMismatchChecker
from .model import CommandHook, FileMappingRule, LocaleMapping, ProjectConfig
from .options import (
    Options,
    apply_config_files,
    apply_project_config,
    apply_user_config,
    check_mandatory_options,
    merge_options,
    options_from_project_config,
)
from .project import load_project_config, parse_project_config
from .user import (
    ServerCredentials,
    UserConfig,
    find_server_prefix,
    load_user_config,
    parse_user_config,
)

__all__ = [
    "CommandHook",
    "ConsoleInteractor",
    "FileMappingRule",
    "LocaleMapping",
    "OptionMismatchChecker",
    "Options",
    "ProjectConfig",
    "ServerCredentials",
    "StreamConsoleInteractor",
    "UserConfig",
    "apply_config_files",
    "apply_project_config",
    "apply_user_config",
    "check_mandatory_options",
    "find_server_prefix",
    "load_project_config",
    "load_user_config",
    "merge_options",
    "options_from_project_config",
    "parse_project_config",
    "parse_user_config",
]
