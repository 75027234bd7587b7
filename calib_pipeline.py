"""Sum the calibration values of every line in a document.

Each line contributes a two-digit number: its first digit times ten plus its
last digit. What counts as a digit depends on the strategy:

  literal: ASCII characters '0'..'9' only
  words:   digits '1'..'9' or the spelled-out words "one".."nine", with
           overlapping words ("oneight") both recognised
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable

from calib_extract import EXTRACTORS, DigitExtractor, get_extractor
from calib_models import CalibrationError, DigitToken, LineResult, NoDigitFound
from calib_source import read_lines

logger = logging.getLogger(__name__)

DEFAULT_INPUT = "input.txt"
DEFAULT_STRATEGY = "words"
MISSING_POLICIES = ("error", "skip", "zero")


def evaluate_line(extractor_cls: type[DigitExtractor], line: str) -> LineResult:
    """Compute one line's calibration value without printing anything."""
    e = extractor_cls(line)
    first = e.first_token()
    last = e.last_token()
    return LineResult(line=line, value=first.value * 10 + last.value, first=first, last=last)


def _zero_fill(extractor_cls: type[DigitExtractor], line: str) -> LineResult:
    e = extractor_cls(line)
    absent = DigitToken(0, None)
    try:
        first = e.first_token()
    except NoDigitFound:
        first = absent
    try:
        last = e.last_token()
    except NoDigitFound:
        last = absent
    return LineResult(line=line, value=first.value * 10 + last.value, first=first, last=last)


def _describe(token: DigitToken) -> str:
    if not token.exists:
        return "none"
    return f"{token.text!r}@{token.position}"


def evaluate(
    extractor_cls: type[DigitExtractor],
    line: str,
    *,
    on_missing: str = "error",
    verbose: bool = False,
) -> int:
    """Print ``"<line> => <value>"`` for *line* and return the value.

    ``on_missing`` decides what happens when the line has no digit:
    ``"error"`` re-raises ``NoDigitFound``, ``"skip"`` logs it and returns 0
    without printing a record, ``"zero"`` scores the missing end as 0.
    """
    if on_missing not in MISSING_POLICIES:
        raise ValueError(f"unknown missing-digit policy {on_missing!r}")

    try:
        result = evaluate_line(extractor_cls, line)
    except NoDigitFound as exc:
        if on_missing == "error":
            raise
        if on_missing == "skip":
            logger.warning("Skipping line: %s", exc)
            return 0
        logger.warning("Scoring missing digit as 0: %s", exc)
        result = _zero_fill(extractor_cls, line)

    print(f"{line} => {result.value}")
    if verbose:
        print(f"      first: {_describe(result.first)}  last: {_describe(result.last)}")
    return result.value


def run(
    extractor_cls: type[DigitExtractor],
    lines: Iterable[str],
    *,
    on_missing: str = "error",
    verbose: bool = False,
) -> int:
    """Evaluate *lines* in order and return the sum of their values."""
    if on_missing not in MISSING_POLICIES:
        raise ValueError(f"unknown missing-digit policy {on_missing!r}")
    total = 0
    count = 0
    for line in lines:
        total += evaluate(extractor_cls, line, on_missing=on_missing, verbose=verbose)
        count += 1
    logger.debug("Evaluated %d lines with %s: total %d", count, extractor_cls.name, total)
    return total


def calibrate(
    input_path: str,
    strategy: str = DEFAULT_STRATEGY,
    on_missing: str = "error",
    verbose: bool = False,
) -> int:
    extractor_cls = get_extractor(strategy)
    lines = read_lines(input_path)
    total = run(extractor_cls, lines, on_missing=on_missing, verbose=verbose)
    print(total)
    return total


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Sum the first/last-digit calibration values of every line in a file.",
    )
    parser.add_argument(
        "input",
        nargs="?", default=DEFAULT_INPUT,
        help=f"Path to the calibration document, text or PDF (default: {DEFAULT_INPUT})",
    )
    parser.add_argument(
        "-s", "--strategy",
        choices=sorted(EXTRACTORS), default=DEFAULT_STRATEGY,
        help=f"What counts as a digit (default: {DEFAULT_STRATEGY})",
    )
    parser.add_argument(
        "--on-missing",
        choices=MISSING_POLICIES, default="error",
        help="What to do with a line that has no digit (default: error)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show which tokens matched on each line",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        calibrate(
            args.input,
            strategy=args.strategy,
            on_missing=args.on_missing,
            verbose=args.verbose,
        )
    except CalibrationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
