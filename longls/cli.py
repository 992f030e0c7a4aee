"""Command-line front door for longls.

Parses the single directory argument, runs the listing, and maps listing
failures onto process exit codes.
"""

from __future__ import annotations

import argparse
import sys

from .errors import DirectoryOpenError, PathNotAccessibleError
from .listing import list_directory
from .theme import available_theme_names

EXIT_USAGE = 1
EXIT_PATH_NOT_ACCESSIBLE = -1
EXIT_DIRECTORY_OPEN = -2


class _UsageArgumentParser(argparse.ArgumentParser):
    """Argument parser whose usage errors exit with ``EXIT_USAGE``."""

    def error(self, message: str) -> None:
        self.print_usage(sys.stderr)
        self.exit(EXIT_USAGE, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    """Build the parser; paths are collected loosely so the count can be checked."""
    parser = _UsageArgumentParser(
        prog="longls",
        usage="%(prog)s <dir>",
        description="List a directory in long format, newest modification first.",
        epilog=f"Config file keys: theme ({', '.join(available_theme_names())}), strict_identity.",
        add_help=False,
    )
    parser.add_argument("paths", nargs="*", metavar="dir", help="Directory to list.")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and list the requested directory.

    ``argv`` defaults to ``sys.argv[1:]``. Exits with ``EXIT_USAGE`` unless
    exactly one path is given, ``EXIT_PATH_NOT_ACCESSIBLE`` when it cannot be
    probed and ``EXIT_DIRECTORY_OPEN`` when it is not a readable directory.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if len(args.paths) != 1:
        parser.error("expected exactly one directory argument")

    try:
        list_directory(args.paths[0])
    except PathNotAccessibleError as exc:
        sys.stderr.write(f"{exc}\n")
        raise SystemExit(EXIT_PATH_NOT_ACCESSIBLE) from None
    except DirectoryOpenError as exc:
        sys.stderr.write(f"{exc}\n")
        raise SystemExit(EXIT_DIRECTORY_OPEN) from None


if __name__ == "__main__":
    main()
