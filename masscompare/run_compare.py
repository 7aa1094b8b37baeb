# masscompare/run_compare.py
# Command-line entry point.
#
# Standard invocation:
#   python -m masscompare.run_compare DIR_A DIR_B
#   masscompare DIR_A DIR_B [--sequential] [--max-workers N]
#               [--chunk-size N] [--allow-shorter-a] [--fail-on-diff]
#               [--verbose]
#
# Stdout: one line per mismatching or erroring file of DIR_A:
#   <path>                    -- content or size differs
#   <error description>: <path>  -- the pair could not be compared
#
# EXIT CODES:
#   0  -- Comparison ran (differences are reported, not failed on), or
#         fewer than two directories were given (usage printed).
#   1  -- --fail-on-diff and at least one line was reported.
#   2  -- DIR_A could not be enumerated, or an option value is invalid.

import argparse
import os
import sys
from datetime import datetime, timezone
from typing import List, Optional, TextIO

from masscompare.core.domain import CompareParameters
from masscompare.core.exceptions import CompareError
from masscompare.core.logging_layer import EventLogger
from masscompare.orchestrator.directory import compare_directories
from masscompare.utils.constants import (
    DEFAULT_CHUNK_SIZE,
    EXIT_DIFFERENCES,
    EXIT_FATAL,
    EXIT_OK,
)


def _write_line(stream: TextIO, line: str) -> None:
    # Names from os.scandir may carry surrogate escapes for undecodable
    # bytes; write them back as the original filesystem bytes.
    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        stream.write(line + "\n")
        return
    stream.flush()
    buffer.write(os.fsencode(line) + b"\n")
    buffer.flush()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=(
            "Report which files of DIR_A differ in content from the "
            "same-named files of DIR_B."
        ),
        prog="masscompare",
    )
    parser.add_argument(
        "dirs",
        nargs="*",
        metavar="DIR",
        help="DIR_A and DIR_B.",
    )
    parser.add_argument(
        "--sequential",
        action="store_true",
        default=False,
        help="Compare one file at a time instead of all files concurrently.",
    )
    parser.add_argument(
        "--max-workers",
        type=int,
        default=None,
        help="Upper bound on concurrent file comparisons (default: one per file).",
    )
    parser.add_argument(
        "--chunk-size",
        type=int,
        default=DEFAULT_CHUNK_SIZE,
        help=f"Bytes per read (default: {DEFAULT_CHUNK_SIZE}).",
    )
    parser.add_argument(
        "--allow-shorter-a",
        action="store_true",
        default=False,
        help="Only reject size(A) > size(B) up front; compare a shorter A as a prefix of B.",
    )
    parser.add_argument(
        "--fail-on-diff",
        action="store_true",
        default=False,
        help="Exit 1 when any file is reported.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=False,
        help="Write the run event log to stderr.",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if len(args.dirs) < 2:
        parser.print_usage(sys.stdout)
        return EXIT_OK
    if len(args.dirs) > 2:
        parser.error(f"expected two directories, got {len(args.dirs)}")

    dir_a, dir_b = args.dirs
    logger = EventLogger()
    run_started = datetime.now(timezone.utc)

    try:
        params = CompareParameters(
            chunk_size=args.chunk_size,
            threaded=not args.sequential,
            max_workers=args.max_workers,
            strict_size=not args.allow_shorter_a,
        )
        report = compare_directories(dir_a, dir_b, params=params, logger=logger)
    except CompareError as exc:
        sys.stderr.write(f"masscompare: {exc.message}\n")
        return EXIT_FATAL

    for line in report.lines():
        _write_line(sys.stdout, line)

    if args.verbose:
        for event in logger.get_event_stream(run_started):
            sys.stderr.write(f"{event.id} {event.type} {event.data}\n")

    if args.fail_on_diff and not report.passed:
        return EXIT_DIFFERENCES
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
