"""Command-line argument parsing for git-status-line."""

import argparse
from typing import List, Optional

from git_status_line.__version__ import __version__
from git_status_line.constants import LEGEND_TEXT, OUTPUT_FORMATS, UNTRACKED_FILES_MODES, OutputFormat


def parse_args(argv: Optional[List[str]] = None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="git-status-line",
        description="Print a compact one-line summary of a git repository's status",
        epilog=LEGEND_TEXT,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-C", "--repo", default=".", metavar="PATH", help="Repository path (default: .)"
    )
    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=OutputFormat.BRANCH,
        help="Show branch and commit with the flags, or the flags only (default: branch)",
    )
    parser.add_argument(
        "--ignored", action="store_true", help="Also report ignored files (the ! flag)"
    )
    parser.add_argument(
        "--untracked-files",
        choices=UNTRACKED_FILES_MODES,
        default="all",
        help="How git looks for untracked files (default: all)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )
    parser.add_argument("--version", action="version", version=f"git-status-line {__version__}")

    return parser.parse_args(argv)
