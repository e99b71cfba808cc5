"""Title normalization, similarity scoring and best-match resolution."""

from .algorithms import jaro_similarity, jaro_winkler_distance
from .cascade import find_best_match
from .normalization import clean_title, sanitize_title, strip_diacritics
from .protocols import ComparableMedia, ComparableTitle, MediaExtractor
from .types import MatchMethod, MatchResult, MatchThresholds

__all__ = [
    "ComparableMedia",
    "ComparableTitle",
    "MatchMethod",
    "MatchResult",
    "MatchThresholds",
    "MediaExtractor",
    "clean_title",
    "find_best_match",
    "jaro_similarity",
    "jaro_winkler_distance",
    "sanitize_title",
    "strip_diacritics",
]
