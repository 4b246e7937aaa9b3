"""Ngram histograms and the heuristic edit-distance estimate built on them.

Instead of counting every 4-byte ngram individually, each window is hashed
with CRC-32 into one of 64 buckets, so a fingerprint has a constant size
no matter how long the text is.  Two fingerprints can then be compared in
constant time to estimate how far apart their texts are.

The estimate is not a certified lower bound on edit distance.  It
undercounts when:

- different ngrams hash into the same bucket and cancel each other out;
- a large-scale transposition moves text around, which barely changes
  ngram frequencies but has a large effect on edit distance.

Callers wanting a certified bound must scale it down themselves (see
``failtriage.core.lower_bound``).
"""

from __future__ import annotations

import hashlib
import threading
import zlib
from typing import Callable, Dict, Optional, Sequence, Tuple, Union

# Shared by every implementation that exchanges fingerprints; do not change.
WINDOW = 4
BUCKETS = 64

Histogram = Tuple[int, ...]
Text = Union[str, bytes]


def as_bytes(text: Text) -> bytes:
    """Return *text* as UTF-8 bytes; ``bytes`` input is returned as is."""
    if isinstance(text, bytes):
        return text
    return text.encode("utf-8")


def compute_histogram(text: Text) -> Histogram:
    """Count the CRC-32 bucket of every ``WINDOW``-byte substring of *text*.

    Uncached; most callers want :func:`histogram`.
    """
    data = as_bytes(text)
    counts = [0] * BUCKETS
    for x in range(len(data) - WINDOW + 1):
        counts[zlib.crc32(data[x:x + WINDOW]) & (BUCKETS - 1)] += 1
    return tuple(counts)


class HistogramCache:
    """Read-through cache of histograms keyed by the exact text value.

    Entries are never evicted.  Inserts are insert-if-absent under a lock:
    when two threads compute the same histogram at once, the first one
    stored wins and the other's (identical) result is discarded.
    """

    def __init__(self) -> None:
        self._entries: Dict[Text, Histogram] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, text: object) -> bool:
        return text in self._entries

    def get(self, text: Text) -> Optional[Histogram]:
        return self._entries.get(text)

    def get_or_compute(
        self,
        text: Text,
        compute: Callable[[Text], Histogram] = compute_histogram,
    ) -> Histogram:
        """Return the cached histogram for *text*, computing it on a miss."""
        hit = self._entries.get(text)
        if hit is not None:
            return hit
        counts = compute(text)
        with self._lock:
            return self._entries.setdefault(text, counts)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()


# Used when a caller doesn't pass its own cache.
DEFAULT_CACHE = HistogramCache()


def histogram(text: Text, cache: Optional[HistogramCache] = None) -> Histogram:
    """Return the 64-bucket ngram histogram of *text*, via *cache*.

    The counts always sum to ``max(0, len(text_bytes) - 3)``.
    """
    if cache is None:
        cache = DEFAULT_CACHE
    return cache.get_or_compute(text)


def estimate_distance(hist_a: Sequence[int], hist_b: Sequence[int]) -> int:
    """Sum of absolute per-bucket differences between two histograms.

    A single-character edit can change up to ``WINDOW`` windows on each
    side, so this is a raw ngram-difference count, not an edit distance.
    """
    return sum(abs(ca - cb) for ca, cb in zip(hist_a, hist_b))


def ngram_distance(a: Text, b: Text, cache: Optional[HistogramCache] = None) -> int:
    """Heuristic distance between two texts using their cached histograms."""
    return estimate_distance(histogram(a, cache), histogram(b, cache))


def histogram_digest(counts: Sequence[int]) -> str:
    """Return a stable SHA-1 hex digest identifying a histogram.

    Texts with identical fingerprints share a digest, which makes it a
    cheap bucketing key before any distance is computed.
    """
    payload = ",".join(str(c) for c in counts)
    return hashlib.sha1(payload.encode("ascii")).hexdigest()
