"""Main CLI entry point for Git Fame."""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from .config import FameConfig
from .errors import GitFameError
from .fame import compute_fame
from .logging_utils import configure_logging
from .serialize import StatisticsSerializer

logger = logging.getLogger(__name__)

LOG_LEVELS = ("critical", "error", "warning", "info", "debug")


def create_parser() -> argparse.ArgumentParser:
    """Create command line argument parser."""
    parser = argparse.ArgumentParser(
        prog="gitfame",
        description="Attribute repository lines to their authors and rank contributors",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  gitfame --repository /path/to/repo
  gitfame --revision v1.0 --order-by commits --format json
  gitfame --extensions .go,.py --exclude 'vendor/*' --use-committer
  gitfame --languages go,python --restrict-to 'src/*' --format csv
        """,
    )

    parser.add_argument(
        "--repository",
        default=".",
        help="Path to the git repository (default: .)",
    )
    parser.add_argument(
        "--revision",
        default="HEAD",
        help="Revision to attribute (default: HEAD)",
    )
    parser.add_argument(
        "--order-by",
        default="lines",
        help="Primary ranking key: lines, commits or files (default: lines)",
    )
    parser.add_argument(
        "--use-committer",
        action="store_true",
        help="Credit lines to committers instead of authors",
    )
    parser.add_argument(
        "--format",
        default="tabular",
        help="Output format: tabular, csv, json or json-lines (default: tabular)",
    )
    parser.add_argument(
        "--extensions",
        action="append",
        default=[],
        help="Comma-separated file extensions to include (repeatable)",
    )
    parser.add_argument(
        "--languages",
        action="append",
        default=[],
        help="Comma-separated language names to include (repeatable)",
    )
    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        help="Comma-separated glob patterns to exclude (repeatable)",
    )
    parser.add_argument(
        "--restrict-to",
        action="append",
        default=[],
        help="Comma-separated glob patterns a path must match (repeatable)",
    )
    parser.add_argument(
        "--log-level",
        type=str.lower,
        choices=LOG_LEVELS,
        default=None,
        help="Logging level (default: $LOG_LEVEL or WARNING)",
    )

    return parser


def split_list_values(values: List[str]) -> tuple:
    """Flatten repeated, comma-separated option values."""
    items = []
    for value in values:
        items.extend(value.split(","))
    return tuple(items)


def create_config(args: argparse.Namespace) -> FameConfig:
    """Create configuration from command line arguments."""
    return FameConfig(
        repository=args.repository,
        revision=args.revision,
        order_by=args.order_by,
        use_committer=args.use_committer,
        output_format=args.format,
        extensions=split_list_values(args.extensions),
        languages=split_list_values(args.languages),
        exclude=split_list_values(args.exclude),
        restrict_to=split_list_values(args.restrict_to),
    )


def run(
    argv: Optional[List[str]] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """Run the CLI and return the process exit code."""
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level, default="WARNING")

    def warn(message: str) -> None:
        print(message, file=stderr)

    try:
        config = create_config(args)
        statistics = compute_fame(config, on_warning=warn)
        StatisticsSerializer(config.output_format).write(statistics, stdout)
        return 0

    except GitFameError as e:
        logger.debug("Run failed", extra={"code": e.code, "details": e.details})
        print(f"error: {e.message}", file=stderr)
        return 1

    except Exception as e:
        logger.exception("Unexpected error")
        print(f"error: internal error: {e}", file=stderr)
        return 1


def main() -> int:
    """Main entry point."""
    return run()


if __name__ == "__main__":
    sys.exit(main())
