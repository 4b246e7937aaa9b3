"""Comparison and histogram output formatters (text and JSON)."""

from __future__ import annotations

import json
from dataclasses import dataclass, asdict
from typing import List

from .core import Comparison


@dataclass
class HistogramReport:
    """Fingerprint of one failure text.

    Attributes:
        source: Where the text came from (e.g. ``"file:out.log"``).
        length: Length of the normalized text in UTF-8 bytes.
        counts: The 64 bucket counts.
        digest: SHA-1 digest of the counts.
    """
    source: str
    length: int
    counts: List[int]
    digest: str


def print_text_report(cmp: Comparison) -> None:
    """Print a human-readable comparison summary to stdout."""
    limit = str(cmp.limit) if cmp.limit > 0 else "none"
    verdict = "SIMILAR" if cmp.within else "DIFFERENT"
    print("\n=== Failure Comparison ===")
    print(f"Limit: {limit} | estimate={cmp.estimate} | lower_bound={cmp.lower_bound}")
    if cmp.skipped:
        print(f"Distance: >{cmp.limit} (exact evaluation skipped)")
    elif cmp.limit > 0 and not cmp.within:
        print(f"Distance: >{cmp.limit}")
    else:
        print(f"Distance: {cmp.distance}")
    print(f"Verdict: {verdict}")


def comparison_to_json(cmp: Comparison) -> str:
    """Serialize a comparison to pretty-printed JSON, without the texts."""
    d = asdict(cmp)
    del d["a"], d["b"]
    return json.dumps(d, indent=2)


def print_histogram(report: HistogramReport) -> None:
    """Print bucket counts eight to a row, followed by the digest."""
    print(f"Source: {report.source} | bytes={report.length}")
    for row in range(0, len(report.counts), 8):
        cells = " ".join(f"{c:>5}" for c in report.counts[row:row + 8])
        print(f"{row:>2}: {cells}")
    print(f"digest: {report.digest}")


def histogram_to_json(report: HistogramReport) -> str:
    return json.dumps(asdict(report), indent=2)
