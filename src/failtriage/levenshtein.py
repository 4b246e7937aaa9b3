"""Bounded Levenshtein edit distance.

Distances are computed over the UTF-8 bytes of the inputs, matching the
byte windows used by the ngram histograms.  A multi-byte character is
therefore several edit units, not one.
"""

from __future__ import annotations

from .ngram import Text, as_bytes


def distance(a: Text, b: Text, limit: int = 0) -> int:
    """Compute the edit distance between *a* and *b*.

    With ``limit > 0`` only the diagonal band of width *limit* is filled
    and the computation stops as soon as a whole row exceeds *limit*.
    Any result ``<= limit`` is exact; anything larger is reported as
    ``limit + 1``.  With ``limit <= 0`` the full distance is returned.

    Only two rows of ``min(len(a), len(b)) + 1`` integers are kept.
    """
    a = as_bytes(a)
    b = as_bytes(b)
    if a == b:
        return 0

    # b is the shorter string and indexes the columns
    if len(a) < len(b):
        a, b = b, a
    m, n = len(a), len(b)

    bounded = limit > 0
    if bounded:
        over = limit + 1
        band = limit
        if m - n > limit:
            return over
    else:
        # m is an upper bound on the distance, so this cap never applies
        over = m + 1
        band = m

    if n == 0:
        return m

    prev = [j if j <= band else over for j in range(n + 1)]
    cur = [0] * (n + 1)

    for i in range(1, m + 1):
        ca = a[i - 1]
        lo = max(1, i - band)
        hi = min(n, i + band)

        if lo == 1:
            cur[0] = min(i, over)
            row_min = cur[0]
        else:
            cur[lo - 1] = over
            row_min = over

        for j in range(lo, hi + 1):
            cost = 0 if ca == b[j - 1] else 1
            v = min(prev[j] + 1, cur[j - 1] + 1, prev[j - 1] + cost)
            if v > over:
                v = over
            cur[j] = v
            if v < row_min:
                row_min = v

        if hi < n:
            cur[hi + 1] = over

        if bounded and row_min > limit:
            return over

        prev, cur = cur, prev

    return prev[n]
