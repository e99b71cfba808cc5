"""Animatch - resolve anime titles against an authoritative catalog."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("animatch")
except PackageNotFoundError:
    # Development environment fallback
    __version__ = "0.1.0-dev"

__license__ = "MIT"

from animatch.domain.entities import MediaRecord, MediaTitle  # noqa: E402
from animatch.domain.matching import (  # noqa: E402
    MatchMethod,
    MatchResult,
    clean_title,
    find_best_match,
    jaro_winkler_distance,
    sanitize_title,
)

__all__ = [
    "MatchMethod",
    "MatchResult",
    "MediaRecord",
    "MediaTitle",
    "__version__",
    "clean_title",
    "find_best_match",
    "jaro_winkler_distance",
    "sanitize_title",
]
