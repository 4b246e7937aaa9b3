"""CLI entry point for failure-triage.

Normalizes failure text and test names, prints ngram fingerprints, and
compares two failures with the gated edit-distance check.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from .core import compare
from .ngram import compute_histogram, histogram_digest
from .normalize import normalize, normalize_name
from .report import (
    HistogramReport,
    comparison_to_json,
    histogram_to_json,
    print_histogram,
    print_text_report,
)
from .sources import read_text


def parse_args(argv=None) -> argparse.Namespace:
    """Build the argument parser and return parsed arguments."""
    parser = argparse.ArgumentParser(
        prog="failure-triage",
        description="Normalize failure messages and check whether two failures are near-duplicates.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log debug details to stderr (or set FAILTRIAGE_LOG_LEVEL)",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    p_norm = sub.add_parser("normalize", help="Print the normalized form of a failure text")
    p_norm.add_argument("file", nargs="?", default="-", help="Input file (default: stdin)")

    p_name = sub.add_parser("name", help="Strip [...] and {...} tags from a test name")
    p_name.add_argument("name", nargs="+", help="Test name (words are joined with spaces)")

    p_hist = sub.add_parser("histogram", help="Print the ngram histogram of a normalized failure text")
    p_hist.add_argument("file", nargs="?", default="-", help="Input file (default: stdin)")
    p_hist.add_argument("--json", action="store_true", help="Output as JSON")

    p_cmp = sub.add_parser("compare", help="Compare two failure texts")
    p_cmp.add_argument("a", help="First failure text file")
    p_cmp.add_argument("b", help="Second failure text file")
    p_cmp.add_argument(
        "--limit", type=int, default=int(os.getenv("FAILTRIAGE_LIMIT", "0")),
        help="Maximum edit distance still considered similar (0 = unbounded)",
    )
    p_cmp.add_argument("--raw", action="store_true", help="Skip normalization")
    p_cmp.add_argument("--json", action="store_true", help="Output as JSON")

    return parser.parse_args(argv)


def _configure_logging(verbose: bool) -> None:
    level = "DEBUG" if verbose else os.getenv("FAILTRIAGE_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )


def main(argv=None) -> None:
    """Entry point: dispatch to the chosen subcommand.

    ``compare`` exits with status 1 when the texts are not within the limit.
    """
    args = parse_args(argv)
    _configure_logging(args.verbose)

    if args.command == "name":
        print(normalize_name(" ".join(args.name)))
        return

    try:
        if args.command == "compare":
            a, _ = read_text(args.a)
            b, _ = read_text(args.b)
        else:
            text, src_desc = read_text(args.file)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)

    if args.command == "normalize":
        sys.stdout.write(normalize(text))
        return

    if args.command == "histogram":
        norm = normalize(text)
        counts = compute_histogram(norm)
        report = HistogramReport(
            source=src_desc,
            length=len(norm.encode("utf-8")),
            counts=list(counts),
            digest=histogram_digest(counts),
        )
        if args.json:
            print(histogram_to_json(report))
        else:
            print_histogram(report)
        return

    result = compare(a, b, limit=args.limit, normalized=args.raw)
    if args.json:
        print(comparison_to_json(result))
    else:
        print_text_report(result)

    if not result.within:
        sys.exit(1)


if __name__ == "__main__":
    main()
