"""Gated comparison: normalize, check the ngram estimate, then edit distance.

This module ties together normalization, the cached ngram histograms and
the bounded Levenshtein evaluator the way a clustering driver is expected
to call them: the cheap estimate first, the exact distance only when the
estimate cannot already rule the pair out.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .levenshtein import distance
from .ngram import WINDOW, HistogramCache, estimate_distance, histogram
from .normalize import normalize

logger = logging.getLogger(__name__)


@dataclass
class Comparison:
    """Outcome of comparing two failure texts.

    Attributes:
        a: First text, normalized.
        b: Second text, normalized.
        limit: Distance limit used (``<= 0`` means unbounded).
        estimate: Raw ngram-difference sum of the two histograms.
        lower_bound: Certified lower bound on the edit distance.
        distance: Bounded edit distance; ``limit + 1`` when over the limit.
        skipped: True if the exact evaluation was skipped by the estimate.
        within: True if ``distance <= limit`` (always True when unbounded).
    """
    a: str
    b: str
    limit: int
    estimate: int
    lower_bound: int
    distance: int
    skipped: bool
    within: bool


def lower_bound(estimate: int) -> int:
    """Turn a raw ngram-difference sum into a certified edit-distance bound.

    One insertion, deletion or substitution removes at most ``WINDOW``
    window occurrences and adds at most ``WINDOW``, so it moves the
    bucketed sum by at most ``2 * WINDOW``.
    """
    per_edit = 2 * WINDOW
    return -(-estimate // per_edit)


def compare(
    a: str,
    b: str,
    limit: int = 0,
    cache: Optional[HistogramCache] = None,
    normalized: bool = False,
) -> Comparison:
    """Compare two failure texts, skipping the exact distance when possible.

    Unless *normalized* is set, both texts go through ``normalize`` first.
    When *limit* is positive and the certified lower bound already exceeds
    it, the distance is reported as ``limit + 1`` without running the
    Levenshtein evaluator.
    """
    if not normalized:
        a = normalize(a)
        b = normalize(b)

    est = estimate_distance(histogram(a, cache), histogram(b, cache))
    bound = lower_bound(est)

    if limit > 0 and bound > limit:
        logger.debug("skipping exact distance: lower bound %d > limit %d", bound, limit)
        dist = limit + 1
        skipped = True
    else:
        dist = distance(a, b, limit)
        skipped = False

    return Comparison(
        a=a,
        b=b,
        limit=limit,
        estimate=est,
        lower_bound=bound,
        distance=dist,
        skipped=skipped,
        within=limit <= 0 or dist <= limit,
    )
