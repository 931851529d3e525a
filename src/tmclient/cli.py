"""Command-line entry point.

Lifecycle of every command:
    1. Parse arguments into an Options layer
    2. Apply project and user config files under it
    3. Configure logging from the merged debug/quiet flags
    4. Run ``before`` hooks, the command, then ``after`` hooks

Failures are logged and turned into exit status 1; ``--errors`` also logs
the traceback.

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, TextIO

import requests

from tmclient.adapters.po import read_glossary_po, write_pot
from tmclient.adapters.xliff import XliffReader
from tmclient.config.model import LocaleMapping
from tmclient.config.options import Options, apply_config_files
from tmclient.constants import DEFAULT_PROJECT_CONFIG, DEFAULT_USER_CONFIG
from tmclient.diagnostics import TmClientError
from tmclient.enums import HookPhase
from tmclient.hooks import run_hooks
from tmclient.mapping.docname import QualifiedSrcDocName, UnqualifiedSrcDocName
from tmclient.mapping.resolver import TransFileResolver
from tmclient.rest.factory import create_client_factory
from tmclient.version import get_version

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

__all__ = ["build_parser", "configure_logging", "main", "options_from_args"]

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(levelname)s %(message)s"


def _split_csv(value: str) -> tuple[str, ...]:
    return tuple(item.strip() for item in value.split(",") if item.strip())


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all global options and commands."""
    parser = argparse.ArgumentParser(
        prog="tmclient",
        description="Client for a translation-management server.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {get_version()}")

    config_group = parser.add_argument_group("configuration")
    config_group.add_argument(
        "--user-config", type=Path, default=DEFAULT_USER_CONFIG,
        help="User config file (default: %(default)s)",
    )
    config_group.add_argument(
        "--project-config", type=Path, default=DEFAULT_PROJECT_CONFIG,
        help="Project config file (default: %(default)s)",
    )
    config_group.add_argument("--url", help="Server base URL")
    config_group.add_argument("--username", help="Username for the REST API")
    config_group.add_argument("--key", help="API key for the REST API")
    config_group.add_argument("--project-type", help="Project type, e.g. gettext or properties")
    config_group.add_argument("--src-dir", type=Path, help="Source document directory")
    config_group.add_argument("--trans-dir", type=Path, help="Translation file directory")
    config_group.add_argument("--includes", type=_split_csv, help="Comma-separated include globs")
    config_group.add_argument("--excludes", type=_split_csv, help="Comma-separated exclude globs")

    behaviour = parser.add_argument_group("behaviour")
    behaviour.add_argument(
        "-B", "--batch-mode", action="store_true",
        help="Never prompt; answer confirmations automatically",
    )
    behaviour.add_argument("-X", "--debug", action="store_true", default=None,
                           help="Enable debug logging")
    behaviour.add_argument("-e", "--errors", action="store_true", default=None,
                           help="Log full tracebacks on failure")
    behaviour.add_argument("-q", "--quiet", action="store_true", default=None,
                           help="Log warnings and errors only")
    behaviour.add_argument("--log-http", action="store_true", help="Log HTTP requests")
    behaviour.add_argument("--disable-ssl-cert", action="store_true",
                           help="Disable SSL certificate verification")

    commands = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")

    trans_path = commands.add_parser(
        "trans-path", help="Print where translations of a source document are stored",
    )
    trans_path.add_argument("doc", help="Source document name relative to the source directory")
    trans_path.add_argument(
        "--locale", action="append", dest="locale_ids", metavar="LOCALE",
        help="Target locale (repeatable; default: locales from the project config)",
    )
    trans_path.set_defaults(handler=_run_trans_path)

    glossary_push = commands.add_parser("glossary-push", help="Replace glossary entries from a PO file")
    glossary_push.add_argument("file", type=Path, help="PO glossary file")
    glossary_push.add_argument("--src-lang", default="en-US", help="Source locale (default: %(default)s)")
    glossary_push.add_argument("--trans-lang", required=True, help="Translation locale")
    glossary_push.set_defaults(handler=_run_glossary_push)

    pot = commands.add_parser("pot", help="Write a gettext template from an XLIFF source document")
    pot.add_argument("file", type=Path, help="XLIFF source document")
    pot.add_argument(
        "--output-dir", type=Path,
        help="Directory for the template (default: the source directory)",
    )
    pot.set_defaults(handler=_run_pot)

    glossary_delete = commands.add_parser("glossary-delete", help="Delete glossary entries")
    which = glossary_delete.add_mutually_exclusive_group(required=True)
    which.add_argument("--lang", help="Delete terms of this locale only")
    which.add_argument("--all", action="store_true", help="Delete the whole glossary")
    glossary_delete.set_defaults(handler=_run_glossary_delete)

    return parser


def options_from_args(args: argparse.Namespace) -> Options:
    """Command line layer of the options. Unset arguments stay unset."""
    return Options(
        user_config=args.user_config,
        project_config=args.project_config,
        url=args.url,
        username=args.username,
        key=args.key,
        project_type=args.project_type,
        src_dir=args.src_dir,
        trans_dir=args.trans_dir,
        includes=args.includes or (),
        excludes=args.excludes or (),
        debug=args.debug,
        errors=args.errors,
        quiet=args.quiet,
        interactive_mode=not args.batch_mode,
        log_http=args.log_http,
        disable_ssl_cert=args.disable_ssl_cert,
    )


def configure_logging(opts: Options) -> None:
    """Set the root logger level from the merged debug/quiet options.

    A stderr handler is installed only if the root logger has none yet.
    """
    if opts.debug:
        level = logging.DEBUG
    elif opts.quiet:
        level = logging.WARNING
    else:
        level = logging.INFO
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=_LOG_FORMAT)
    root.setLevel(level)


def _locale_mappings(opts: Options, locale_ids: Sequence[str] | None) -> tuple[LocaleMapping, ...]:
    if not locale_ids:
        return opts.locales
    configured = {mapping.locale: mapping for mapping in opts.locales}
    return tuple(configured.get(locale_id, LocaleMapping(locale_id)) for locale_id in locale_ids)


def _run_trans_path(opts: Options, args: argparse.Namespace, out: TextIO) -> None:
    resolver = TransFileResolver(opts)
    if Path(args.doc).suffix:
        doc = QualifiedSrcDocName(args.doc)
    else:
        doc = UnqualifiedSrcDocName(args.doc).to_qualified(resolver.project_type)
    mappings = _locale_mappings(opts, args.locale_ids)
    if not mappings:
        logger.warning("No locales given and none configured in the project config")
    for mapping in mappings:
        print(resolver.resolve_trans_file(doc, mapping).as_posix(), file=out)


def _run_pot(opts: Options, args: argparse.Namespace, out: TextIO) -> None:
    doc = XliffReader().read(args.file)
    base_dir = args.output_dir if args.output_dir is not None else opts.src_dir
    print(write_pot(base_dir, doc).as_posix(), file=out)


def _run_glossary_push(opts: Options, args: argparse.Namespace, out: TextIO) -> None:
    glossary = read_glossary_po(args.file, args.src_lang, args.trans_lang)
    client = create_client_factory(opts).glossary_client()
    client.put(glossary)
    print(f"Pushed {len(glossary.glossary_entries)} glossary entries", file=out)


def _run_glossary_delete(opts: Options, args: argparse.Namespace, out: TextIO) -> None:
    client = create_client_factory(opts).glossary_client()
    if args.all:
        client.delete_all()
        print("Deleted all glossary entries", file=out)
    else:
        client.delete(args.lang)
        print(f"Deleted glossary entries for {args.lang}", file=out)


def main(argv: Sequence[str] | None = None, out: TextIO | None = None) -> int:
    """Run the command line client.

    Returns:
        Process exit status
    """
    out = out if out is not None else sys.stdout
    args = build_parser().parse_args(argv)
    cli_opts = options_from_args(args)
    configure_logging(cli_opts)
    handler: Callable[[Options, argparse.Namespace, TextIO], None] = args.handler

    opts = cli_opts
    try:
        opts = apply_config_files(cli_opts)
        configure_logging(opts)
        logger.info("Command: %s", args.command)
        hooks = opts.hooks_for(args.command)
        run_hooks(hooks, HookPhase.BEFORE)
        handler(opts, args, out)
        run_hooks(hooks, HookPhase.AFTER)
    except (TmClientError, requests.RequestException, OSError) as e:
        if opts.errors:
            logger.exception("Command %s failed", args.command)
        else:
            logger.error("Command %s failed: %s", args.command, e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
