"""Command-line interface for git-status-line"""

import sys
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from git_status_line.cli.args import parse_args
from git_status_line.config import Config
from git_status_line.core import StatusLine
from git_status_line.exceptions import GitStatusLineError, NotAGitRepositoryError
from git_status_line.logging_config import get_logger, setup_logging

console = Console(highlight=False)
error_console = Console(stderr=True)
logger = get_logger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    parsed_args = parse_args(argv)
    setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug)

    try:
        config = Config(
            output_format=parsed_args.format,
            show_ignored=parsed_args.ignored,
            untracked_files=parsed_args.untracked_files,
            verbose=parsed_args.verbose,
            debug=parsed_args.debug,
        )

        if parsed_args.debug:
            error_console.print("[yellow]Configuration:[/yellow]")
            for key, value in config.to_dict().items():
                error_console.print(f"  {key}: {value}")

        line = StatusLine(parsed_args.repo, config).get_line()
        console.print(line, markup=False, soft_wrap=True)
        return 0
    except NotAGitRepositoryError as e:
        # Stay quiet so the command can sit in a prompt outside repositories
        logger.info(str(e))
        return 1
    except KeyboardInterrupt:
        error_console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except GitStatusLineError as e:
        error_console.print(f"[red]Error: {escape(str(e))}[/red]")
        if parsed_args.debug:
            error_console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
