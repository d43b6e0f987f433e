"""Command line access to the period formatter.

Usage:
    python -m src.duration.cli compose 3 day      # P3D
    python -m src.duration.cli split P6M          # 6 month
    python -m src.duration.cli humanize P1Y2D     # 1 год 2 дня
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from dotenv import load_dotenv

from src.config.logging import configure_logging
from src.config.settings import load_settings
from src.duration.formatter import (
    InvalidArgumentError,
    MalformedDurationError,
    compose_period,
    interval_to_string,
    period_to_count_and_unit,
)
from src.duration.schema import PeriodType

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_INPUT = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Convert single-unit ISO 8601 periods to and from Russian text."
    )
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL for this run.")
    commands = parser.add_subparsers(dest="command", required=True)

    compose = commands.add_parser("compose", help="Build a duration string from a count and unit.")
    compose.add_argument("count", type=int)
    compose.add_argument("unit", help=f"One of: {', '.join(p.value for p in PeriodType)}.")

    split = commands.add_parser("split", help="Print the largest non-zero unit as 'COUNT UNIT'.")
    split.add_argument("duration")

    humanize = commands.add_parser("humanize", help="Render a duration as Russian text.")
    humanize.add_argument("duration")

    return parser


def _run(args: argparse.Namespace) -> str:
    if args.command == "compose":
        return compose_period(args.count, args.unit)
    if args.command == "split":
        count, unit = period_to_count_and_unit(args.duration)
        return f"{count} {unit}"
    return interval_to_string(args.duration)


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point; returns the process exit status."""

    args = _build_parser().parse_args(argv)

    load_dotenv()
    settings = load_settings()
    level = configure_logging(args.log_level or settings.log_level)
    logger.debug("logging configured level=%s", level)

    try:
        output = _run(args)
    except (InvalidArgumentError, MalformedDurationError) as exc:
        logger.info("rejected command=%s reason=%s", args.command, exc)
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    logger.info("handled command=%s", args.command)
    print(output)
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
