"""Protocols for the matching boundary.

Candidates can be any caller-owned type; the cascade only reads them through
an extractor that returns something shaped like ``ComparableMedia``.
"""

from collections.abc import Callable
from typing import Protocol


class ComparableTitle(Protocol):
    """Protocol for title objects that expose an ordered title set."""

    def all_titles(self) -> list[str]:
        """Non-empty title variants in priority order."""
        ...


class ComparableMedia(Protocol):
    """Protocol for the fields the cascade compares."""

    @property
    def title(self) -> ComparableTitle | None:
        """Title variants of the record."""
        ...

    @property
    def year(self) -> int | None:
        """Release year."""
        ...

    @property
    def episodes(self) -> int | None:
        """Episode count."""
        ...


# Pure accessor from a candidate to its comparable view
type MediaExtractor[T] = Callable[[T], ComparableMedia]

SimilarityFunction = Callable[[str, str], float]
