"""Command-line interface for lsdirp.

This module provides the command-line interface for lsdirp, printing the files or
directories matched by one or more paths or glob patterns. It handles argument
parsing, output formatting, diagnostics and exit codes.

Exit Codes:
    0: Successful completion
    1: Runtime error during execution (including invalid patterns)
    2: Command-line syntax error
    126: Permission denied
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # Files below src, grouped by directory
    $ lsdirp src

    # Flat list of Python files, ignoring tests
    $ lsdirp --flatten -i "**/tests" "**/*.py"
"""

import argparse
import json
import logging
import os
import sys
from typing import List, Union

from lsdirp.cli.argparser import create_parser, validate_args
from lsdirp.lsdirp import lsdirp
from lsdirp.options import LsdirpOptions
from lsdirp.types import ResultMap


def configure_logging(verbosity: int) -> None:
    """Send lsdirp diagnostics and warnings to stderr.

    Args:
        verbosity: 0 for warnings and errors, 1 for info, 2 or more for debug.
    """
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", stream=sys.stderr, force=True)
    logging.captureWarnings(True)


def build_options(args: argparse.Namespace) -> LsdirpOptions:
    """Map parsed command-line arguments onto LsdirpOptions."""
    return LsdirpOptions(
        root=args.root,
        flatten=args.flatten,
        full_path=args.full_path,
        ignore_paths=tuple(args.ignore),
        prepend_path=not args.names_only,
        file_type=args.type,
        include_parent_dir=args.include_parent_dir,
        allow_symlinks=args.follow_symlinks,
        depth=args.depth,
    )


def format_result(result: Union[ResultMap, List[str]], output_format: str = "text") -> str:
    """Format a listing for output.

    Args:
        result: A flat list of paths or a mapping of directories to children.
        output_format: ``"text"`` or ``"json"``.

    Returns:
        The formatted listing, without a trailing newline.

    Example:
        >>> print(format_result({"src": ["src/a.py"], "src/sub": []}))
        src:
          src/a.py
        <BLANKLINE>
        src/sub:
        >>> format_result(["a.py", "b.py"], "json")
        '[\\n  "a.py",\\n  "b.py"\\n]'
    """
    if output_format == "json":
        return json.dumps(result, indent=2)

    if isinstance(result, list):
        return "\n".join(result)

    blocks = []
    for directory, children in result.items():
        blocks.append("\n".join([f"{directory}:"] + [f"  {child}" for child in children]))
    return "\n\n".join(blocks)


def main() -> None:
    """Main entry point for the lsdirp command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        126: Permission denied
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe (SIGPIPE) on Unix-like systems
    """
    parser = create_parser()
    args = parser.parse_args()

    try:
        validate_args(args)
    except ValueError as e:
        # Exits with status 2, like any other syntax error
        parser.error(str(e))

    configure_logging(args.verbose)

    try:
        result = lsdirp(args.specs, build_options(args))
        output = format_result(result, args.format)
        if output:
            print(output)
            sys.stdout.flush()
    except PermissionError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(126)
    except BrokenPipeError:
        # Point stdout at devnull so the interpreter's final flush does not fail again
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        sys.exit(141)
    except KeyboardInterrupt:
        sys.exit(130)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
