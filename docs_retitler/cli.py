from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from . import process_directory, write_report
from .renamer import env_path

logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")

LOGGER = logging.getLogger(__name__)


def _add_common_arguments(parser: argparse.ArgumentParser, default_docs_dir: Path) -> None:
    parser.add_argument(
        "--docs-dir",
        type=Path,
        default=env_path("DOCS_DIR", default_docs_dir),
        help="Directory scanned recursively for Markdown files (default: %(default)s or DOCS_DIR)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Log what would change without renaming or rewriting anything",
    )
    parser.add_argument(
        "--report",
        type=Path,
        default=os.getenv("REPORT_JSON"),
        help="Optional path for a JSON report of every processed file (or REPORT_JSON)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )


def build_parser(default_docs_dir: Path = Path("docs")) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Rename Markdown documents after their front-matter titles")
    subparsers = parser.add_subparsers(dest="command", required=True)

    rename_parser = subparsers.add_parser("rename", help="Rename files to match their titles")
    _add_common_arguments(rename_parser, default_docs_dir)

    strip_parser = subparsers.add_parser(
        "strip", help="Rename files to match their titles, then remove their front matter"
    )
    _add_common_arguments(strip_parser, default_docs_dir)

    return parser


def main(argv: list[str] | None = None, *, default_docs_dir: Path = Path("docs")) -> int:
    parser = build_parser(default_docs_dir)
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        summary = process_directory(
            args.docs_dir,
            strip_front_matter=args.command == "strip",
            dry_run=args.dry_run,
        )
    except (FileNotFoundError, NotADirectoryError) as exc:
        parser.error(str(exc))

    if args.report is not None:
        write_report(summary, args.report)

    if summary["failed"]:
        LOGGER.error("%d file(s) could not be processed", summary["failed"])
        return 1
    return 0


def rename_cli(default_docs_dir: Path = Path("docs")) -> None:
    argv = sys.argv[1:]
    sys.exit(main(["rename", *argv], default_docs_dir=default_docs_dir))


def strip_cli(default_docs_dir: Path = Path("docs")) -> None:
    argv = sys.argv[1:]
    sys.exit(main(["strip", *argv], default_docs_dir=default_docs_dir))


if __name__ == "__main__":
    sys.exit(main())
