"""Bounded string similarity for clustering near-duplicate failure messages."""

from .core import Comparison, compare, lower_bound
from .levenshtein import distance
from .ngram import HistogramCache, estimate_distance, histogram, histogram_digest, ngram_distance
from .normalize import normalize, normalize_name

__all__ = [
    "Comparison",
    "HistogramCache",
    "compare",
    "distance",
    "estimate_distance",
    "histogram",
    "histogram_digest",
    "lower_bound",
    "ngram_distance",
    "normalize",
    "normalize_name",
]
