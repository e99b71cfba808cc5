"""Animatch domain layer - pure matching logic with no I/O."""

from . import entities, matching
from .entities import MediaRecord, MediaTitle
from .matching import (
    MatchMethod,
    MatchResult,
    MatchThresholds,
    clean_title,
    find_best_match,
    jaro_winkler_distance,
    sanitize_title,
)

__all__ = [
    # Modules
    "entities",
    "matching",
    # Entities
    "MediaRecord",
    "MediaTitle",
    # Matching
    "MatchMethod",
    "MatchResult",
    "MatchThresholds",
    "clean_title",
    "find_best_match",
    "jaro_winkler_distance",
    "sanitize_title",
]
