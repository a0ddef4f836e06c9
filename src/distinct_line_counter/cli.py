"""Command-line interface for distinct line counter."""

import argparse
import logging
import sys

from distinct_line_counter.errors import DistinctCountError
from distinct_line_counter.merge.strategy import STRATEGIES
from distinct_line_counter.partition import DEFAULT_CHUNK_SIZE
from distinct_line_counter.solver.solve import main_solve

logger = logging.getLogger(__name__)


def configure_logging(level: int = logging.INFO) -> None:
    """Configure logging to write to stderr."""
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="distinct-line-counter",
        description="Count distinct lines (e.g. IP addresses) in a large text file.",
    )

    parser.add_argument(
        "input_file",
        help="Path to the input file, one value per line ('-' reads stdin)",
    )

    parser.add_argument(
        "--chunk-size",
        type=int,
        default=DEFAULT_CHUNK_SIZE,
        help=f"Lines sorted in memory per chunk (default: {DEFAULT_CHUNK_SIZE})",
    )

    parser.add_argument(
        "--tmp-dir",
        default=None,
        help="Directory for temporary chunk files (default: system temp dir)",
    )

    parser.add_argument(
        "--merge-strategy",
        choices=sorted(STRATEGIES),
        default=None,
        help="Frontier used by the k-way merge (default: $DLC_MERGE_STRATEGY or heap)",
    )

    parser.add_argument(
        "--skip-empty",
        action="store_true",
        help="Ignore blank lines instead of counting them as a value",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level (default: INFO)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Configure logging based on --log-level
    log_level = getattr(logging, args.log_level)
    configure_logging(log_level)

    if args.chunk_size < 1:
        parser.error(f"--chunk-size must be positive, got {args.chunk_size}")

    try:
        main_solve(
            input_path=args.input_file,
            chunk_size=args.chunk_size,
            tmp_dir=args.tmp_dir,
            strategy=args.merge_strategy,
            skip_empty=args.skip_empty,
        )
    except ValueError as exc:
        parser.error(str(exc))
    except (DistinctCountError, OSError) as exc:
        logger.error("%s", exc)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
