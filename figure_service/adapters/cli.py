"""
figure_service/adapters/cli.py

Line-oriented command-line interface: each input line is "<x> <y>".

Usage:
    figure-cli "10 10" "5 5"
    printf '10 10\\n-20 1\\n' | figure-cli
"""

import argparse
import sys
from typing import Iterable, List, Optional, TextIO

from figure_service.core.domain.exceptions import CoordinateError
from figure_service.core.use_cases.classify_point import ClassifyPoint, format_result
from figure_service.shared.logging_config import configure_logging


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="figure-cli",
        description="Classify points as inside, border or outside the figure.",
    )
    parser.add_argument(
        "lines",
        nargs="*",
        metavar="LINE",
        help=(
            'A point written as "<x> <y>" (quote it). '
            "If omitted, lines are read from stdin."
        ),
    )
    return parser


# ---------------------------------------------------------------------------
# Command handling
# ---------------------------------------------------------------------------


def classify_lines(
    lines: Iterable[str],
    out: TextIO,
    use_case: Optional[ClassifyPoint] = None,
) -> int:
    """
    Print one rendered result per line. Returns the number of rejected lines.
    """
    use_case = use_case or ClassifyPoint()
    failures = 0
    for line in lines:
        try:
            result = use_case.execute_line(line)
        except CoordinateError as exc:
            failures += 1
            print(format_result(exc), file=out)
        else:
            print(format_result(result), file=out)
    return failures


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    configure_logging(stream=sys.stderr)

    lines: Iterable[str] = args.lines if args.lines else sys.stdin
    failures = classify_lines(lines, sys.stdout)
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
