from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from manifest_locales.config import LOGGER_NAME, LOGGING_LEVELS, OUTPUT_FORMATTER
from manifest_locales.config.settings import Settings
from manifest_locales.exceptions import SettingsError
from manifest_locales.fs import Workspace
from manifest_locales.tasks import transform_manifest
from manifest_locales.version import __version__


class ParsedArgs(argparse.Namespace):
    _verbose: int
    root: Path
    config: Path | None

    @property
    def logging_level(self) -> int:
        return LOGGING_LEVELS[min(self._verbose, 4)]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="manifest_locales",
        description=(
            "Fill in supportedLocales of the text bundles configured in manifest.json files, "
            "based on the properties files available."
        ),
    )
    parser.add_argument("--version", action="version", version=f"v{__version__}")
    # warnings and errors are always shown, each -v adds a level of detail
    parser.add_argument("-v", dest="_verbose", action="count", default=1)
    parser.add_argument(
        "root",
        nargs="?",
        type=Path,
        default=Path("."),
        help="resources root directory, bundle names are resolved from here",
    )
    parser.add_argument("--config", type=Path, default=None, help="JSON settings file")
    # settings file overrides, left unset unless given
    parser.add_argument(
        "--namespace",
        default=argparse.SUPPRESS,
        help="only process manifests below this namespace, e.g. sap.ui.demo.app",
    )
    parser.add_argument(
        "--compact",
        dest="pretty_print",
        action="store_false",
        default=argparse.SUPPRESS,
        help="write manifests without any indentation",
    )
    parser.add_argument("--indent", type=int, default=argparse.SUPPRESS)
    parser.add_argument("--fallback-locale", dest="default_fallback_locale", default=argparse.SUPPRESS)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv, namespace=ParsedArgs())

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(args.logging_level)
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(OUTPUT_FORMATTER)
    logger.addHandler(console_handler)

    try:
        settings = Settings(args, args.config)
        options = settings.transform_options()
    except SettingsError as exc:
        logger.error(f"Settings error: {exc}")
        return 4

    if not args.root.is_dir():
        logger.error(f"Not a directory: {args.root}")
        return 4

    logger.debug(f"manifest_locales v{__version__}, root: {args.root.resolve()}")
    report = asyncio.run(
        transform_manifest(Workspace(args.root), options, namespace=settings.namespace)
    )
    logger.info(
        f"{len(report.changed)} manifest(s) changed, {len(report.unchanged)} unchanged, "
        f"{len(report.failed)} failed"
    )
    return 0 if report.ok else 1


if __name__ == "__main__":
    sys.exit(main())
