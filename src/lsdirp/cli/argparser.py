"""Command-line argument parsing for lsdirp.

This module defines the command-line interface for lsdirp,
handling argument parsing and validation.
"""

import argparse

from lsdirp import __version__
from lsdirp.options import ALWAYS_IGNORE


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with lsdirp's options.
    """
    description = f"""
    lsdirp: list files and directories recursively from paths and glob patterns.

    Each SPEC is a path or a glob pattern, resolved against --root. A plain path
    is listed recursively; a glob lists only what it matches, descending across
    directories only when it contains '**'.

    The patterns {", ".join(ALWAYS_IGNORE)} are always ignored.
    """

    epilog = """
    Examples:
      # List every file below the current directory, grouped by directory
      lsdirp .

      # Flat list of TypeScript sources
      lsdirp --flatten "src/**/*.ts"

      # Only the immediate children of src
      lsdirp -d 1 src

      # Ignore build output and list absolute paths
      lsdirp -A -i "**/dist" -i "*.log" .

      # List directories, following symbolic links
      lsdirp -t directory -L --flatten .

      # JSON output, bare names only
      lsdirp -f json -n src
    """

    parser = argparse.ArgumentParser(
        prog="lsdirp",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # Version information
    parser.add_argument(
        "-V", "--version", action="version", version=f"lsdirp {__version__}", help="Show the version and exit"
    )

    parser.add_argument(
        "specs",
        nargs="+",
        metavar="SPEC",
        help="Path or glob pattern to list. A leading '!' is not supported and the spec is skipped.",
    )
    parser.add_argument(
        "-r",
        "--root",
        default=".",
        help="Base directory applied to every SPEC (default: current directory).",
    )
    parser.add_argument(
        "-A",
        "--full-path",
        action="store_true",
        help="Output absolute paths instead of paths relative to the current directory.",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        action="append",
        default=[],
        metavar="PATTERN",
        help=(
            "Glob pattern of paths to ignore, matched against the listed path and against directory "
            "names. Can be specified multiple times."
        ),
    )
    parser.add_argument(
        "-t",
        "--type",
        choices=["file", "directory"],
        default="file",
        help="Kind of entry to list (default: file).",
    )
    parser.add_argument(
        "-P",
        "--include-parent-dir",
        action="store_true",
        help="With --type directory and --flatten, also list each traversed directory itself.",
    )
    parser.add_argument(
        "-L",
        "--follow-symlinks",
        action="store_true",
        help="Follow symbolic links. Each link is followed at most once, so cycles terminate.",
    )
    parser.add_argument(
        "-d",
        "--depth",
        type=int,
        default=0,
        help="Levels of nesting to list below each SPEC; 0 means unlimited (default: 0).",
    )
    parser.add_argument(
        "-n",
        "--names-only",
        action="store_true",
        help="List bare entry names under each directory instead of full paths. Implies grouped output.",
    )
    parser.add_argument(
        "-F",
        "--flatten",
        action="store_true",
        help="Output a single flat list instead of entries grouped by directory.",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase diagnostic output on stderr (-v for info, -vv for debug).",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.depth < 0:
        raise ValueError("--depth must be a non-negative integer")

    if args.include_parent_dir and args.type != "directory":
        raise ValueError("--include-parent-dir requires --type directory")
