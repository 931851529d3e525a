"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Keeps messages testable and documents every error case in one place.
    """

    _PLACEHOLDERS_HINT = (
        "Valid placeholders are {path}, {filename}, {extension}, {locale} "
        "and {locale_with_underscore}"
    )

    @staticmethod
    def url_required() -> Diagnostic:
        """Server URL missing after all config sources were applied."""
        return Diagnostic(
            code=DiagnosticCode.URL_REQUIRED,
            message="Server URL must be specified",
            hint="Pass --url or add <url> to the project config",
        )

    @staticmethod
    def username_required() -> Diagnostic:
        """Username missing after all config sources were applied."""
        return Diagnostic(
            code=DiagnosticCode.USERNAME_REQUIRED,
            message="Username must be specified",
            hint="Pass --username or add <prefix>.username to [servers] in the user config",
        )

    @staticmethod
    def api_key_required() -> Diagnostic:
        """API key missing after all config sources were applied."""
        return Diagnostic(
            code=DiagnosticCode.API_KEY_REQUIRED,
            message="API key must be specified",
            hint="Pass --key or add <prefix>.key to [servers] in the user config",
        )

    @staticmethod
    def project_config_invalid(path: str, reason: str) -> Diagnostic:
        """Project config file exists but cannot be parsed.

        Args:
            path: Path of the project config file
            reason: Parser error description
        """
        return Diagnostic(
            code=DiagnosticCode.PROJECT_CONFIG_INVALID,
            message=f"Unable to read project config: {reason}",
            location=path,
        )

    @staticmethod
    def user_config_invalid(path: str, reason: str) -> Diagnostic:
        """User config file exists but cannot be parsed.

        Args:
            path: Path of the user config file
            reason: Parser error description
        """
        return Diagnostic(
            code=DiagnosticCode.USER_CONFIG_INVALID,
            message=f"Unable to read user config: {reason}",
            location=path,
        )

    @staticmethod
    def locale_invalid(locale_id: str, reason: str) -> Diagnostic:
        """Locale id given on the command line is malformed or unknown.

        Args:
            locale_id: The rejected locale id
            reason: Babel error description
        """
        return Diagnostic(
            code=DiagnosticCode.LOCALE_INVALID,
            message=f"Invalid locale '{locale_id}': {reason}",
            hint="Use a BCP-47 id such as de-DE or zh-Hant-TW",
        )

    @staticmethod
    def project_type_unknown(name: str, known: tuple[str, ...]) -> Diagnostic:
        """Project type name does not match any ProjectType member.

        Args:
            name: The unrecognized project type
            known: All accepted project type names
        """
        return Diagnostic(
            code=DiagnosticCode.PROJECT_TYPE_UNKNOWN,
            message=f"Unknown project type '{name}'",
            hint=f"Supported types: {', '.join(known)}",
        )

    @staticmethod
    def project_type_required() -> Diagnostic:
        """Project type needed for path resolution but never configured."""
        return Diagnostic(
            code=DiagnosticCode.PROJECT_TYPE_REQUIRED,
            message="Project type must be specified",
            hint="Pass --project-type or add <project-type> to the project config",
        )

    @staticmethod
    def no_default_mapping(project_type: str) -> Diagnostic:
        """No built-in mapping rule exists for a project type.

        Args:
            project_type: Project type without a default rule
        """
        return Diagnostic(
            code=DiagnosticCode.NO_DEFAULT_MAPPING,
            message=f"No default mapping rule for project type '{project_type}'",
            hint="Add a <rule> to the project config",
        )

    @staticmethod
    def invalid_rule(rule: str) -> Diagnostic:
        """Mapping rule lacks any locale placeholder.

        Args:
            rule: The rule template
        """
        return Diagnostic(
            code=DiagnosticCode.MAPPING_RULE_INVALID,
            message=f"Invalid file mapping rule (no locale placeholder): {rule}",
            hint="A rule must contain {locale} or {locale_with_underscore}",
            location=rule,
        )

    @staticmethod
    def invalid_rules(rules: tuple[str, ...]) -> Diagnostic:
        """Aggregate failure for all invalid mapping rules.

        Args:
            rules: Every rule that failed validation
        """
        return Diagnostic(
            code=DiagnosticCode.MAPPING_RULE_INVALID,
            message=f"{len(rules)} invalid file mapping rule(s): {'; '.join(rules)}",
            hint="A rule must contain {locale} or {locale_with_underscore}",
        )

    @staticmethod
    def unrecognized_variables(rule: str) -> Diagnostic:
        """Mapping rule contains braces that are not a known placeholder.

        Args:
            rule: The rule template
        """
        return Diagnostic(
            code=DiagnosticCode.MAPPING_RULE_SUSPICIOUS,
            message=f"File mapping rule contains unrecognized variables: {rule}",
            hint=ErrorTemplate._PLACEHOLDERS_HINT,
            location=rule,
            severity="warning",
        )

    @staticmethod
    def doc_name_unqualifiable(name: str, project_type: str) -> Diagnostic:
        """Unqualified document name cannot gain an extension for this project type.

        Args:
            name: Unqualified document name
            project_type: Project type that has no fixed source extension
        """
        return Diagnostic(
            code=DiagnosticCode.DOC_NAME_UNQUALIFIABLE,
            message=f"Cannot derive an extension for '{name}' in a '{project_type}' project",
            hint="Use the qualified document name (with extension)",
        )

    @staticmethod
    def xliff_write_failed(path: str) -> Diagnostic:
        """XLIFF output file or directory could not be written.

        Args:
            path: Intended output path
        """
        return Diagnostic(
            code=DiagnosticCode.XLIFF_WRITE_FAILED,
            message="Error writing Xliff file",
            location=path,
        )

    @staticmethod
    def xliff_generation_failed(path: str) -> Diagnostic:
        """XLIFF tree could not be built (e.g. illegal XML characters).

        Args:
            path: Intended output path
        """
        return Diagnostic(
            code=DiagnosticCode.XLIFF_GENERATION_FAILED,
            message="Error generating Xliff file format",
            location=path,
        )

    @staticmethod
    def xliff_malformed(path: str, reason: str) -> Diagnostic:
        """XLIFF input is structurally invalid.

        Args:
            path: Input path
            reason: What is wrong
        """
        return Diagnostic(
            code=DiagnosticCode.XLIFF_MALFORMED,
            message=f"Malformed Xliff document: {reason}",
            location=path,
        )

    @staticmethod
    def po_write_failed(path: str) -> Diagnostic:
        """Gettext template could not be written.

        Args:
            path: Intended output path
        """
        return Diagnostic(
            code=DiagnosticCode.PO_WRITE_FAILED,
            message="Error writing gettext template",
            location=path,
        )

    @staticmethod
    def user_aborted() -> Diagnostic:
        """User answered anything but yes at a confirmation prompt."""
        return Diagnostic(
            code=DiagnosticCode.USER_ABORTED,
            message="Operation aborted by user",
        )

    @staticmethod
    def hook_failed(command: str, returncode: int) -> Diagnostic:
        """Hook command exited with an error.

        Args:
            command: The hook command line
            returncode: Exit status
        """
        return Diagnostic(
            code=DiagnosticCode.HOOK_FAILED,
            message=f"Command hook '{command}' failed with exit status {returncode}",
        )
