"""Command-line interface for the ``quartersort`` package.

This module exposes the CLI entrypoint used by the console script
``quartersort``. It is a thin adapter from parsed arguments to a
:class:`quartersort.models.RunConfig` and the library function
:func:`quartersort.organize.organize`, so tests can exercise the logic
without spawning subprocesses.
"""
import argparse
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from . import organize as organize_mod
from .errors import ConfigurationError, QuarterSortError
from .models import DEFAULT_IGNORED_EXTENSIONS, RunConfig

try:
    __version__ = version("quartersort")
except PackageNotFoundError:
    __version__ = "0+unknown"

EXIT_ERROR = 1
EXIT_CONFIG = 2


def config_from_args(args) -> RunConfig:
    extra = tuple(getattr(args, "ignore_ext", None) or ())
    return RunConfig(
        input_dir=Path(args.input_dir),
        output_dir=Path(args.output_dir),
        operation=args.operation,
        dry_run=bool(getattr(args, "dry_run", False)),
        ignored_extensions=DEFAULT_IGNORED_EXTENSIONS + extra,
        mtime_fallback=bool(getattr(args, "mtime_fallback", False)),
        progress=bool(getattr(args, "progress", False)),
    )


def cmd_organize(args) -> int:
    """Handle the `organize` subcommand."""
    config = config_from_args(args)
    try:
        results = organize_mod.organize(config)
    except ConfigurationError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_CONFIG
    except (QuarterSortError, OSError) as e:
        print(f"error: unable to organize files in {config.input_dir}: {e}", file=sys.stderr)
        return EXIT_ERROR

    if config.dry_run:
        planned = sum(1 for r in results if not r.skipped_reason)
        print(f"DRY RUN: would organize {planned} files")
    else:
        print(f"Organized {sum(1 for r in results if r.performed)} files")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quartersort",
        description="Sort files into YEAR/QUARTER folders by creation time.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=__version__
    )
    sub = parser.add_subparsers(dest="cmd")

    ###########################################
    # -------- subcommand: organize -------- #
    ###########################################
    p_org = sub.add_parser("organize", help="Organize files into folders for every quarter of the year.")
    p_org.add_argument("input_dir", help="Directory with the files to organize (walked recursively)")
    p_org.add_argument("output_dir", help="Directory where YEAR/QUARTER folders are created")
    p_org.add_argument(
        "--dry-run",
        action="store_true",
        help="Do not copy or move files; only print what would happen",
    )
    p_org.add_argument(
        "--operation",
        default="copy",
        help="Type of operation to use when organizing files: copy (default) or move",
    )
    p_org.add_argument(
        "--mtime-fallback",
        action="store_true",
        help=(
            "Use the modification time when the filesystem does not report a creation time. "
            "Without this flag such files go to UNDEFINED/UNDEFINED."
        ),
    )
    p_org.add_argument(
        "--ignore-ext",
        action="append",
        metavar="EXT",
        help="Additional file extension to skip, including the dot (repeatable). .DS_Store is always skipped.",
    )
    p_org.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar while walking the input directory",
    )
    p_org.set_defaults(func=cmd_organize)

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        return 0
    return args.func(args)
