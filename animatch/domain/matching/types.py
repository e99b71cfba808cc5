"""Pure domain types for title matching.

These types describe how a match was found and how strict the rule that
produced it was.
"""

from collections.abc import Callable
from enum import StrEnum
from typing import Any, Generic, TypeVar

from attrs import define, field, validators

from animatch.config import settings

T = TypeVar("T")


class MatchMethod(StrEnum):
    """Cascade tier that produced a match, from strictest to loosest."""

    EXACT_YEAR_EPISODE_RAW = "exact_year_episode_raw"
    EXACT_YEAR_EPISODE_NORMALIZED = "exact_year_episode_normalized"
    EXACT_YEAR_RAW = "exact_year_raw"
    EXACT_YEAR_NORMALIZED = "exact_year_normalized"
    EXACT = "exact"
    EXACT_NORMALIZED = "exact_normalized"
    LOOSE_YEAR = "loose_year"
    LOOSE = "loose"
    LAST_RESORT = "last_resort"
    # Closest title found, not necessarily a good one
    NULL_METHOD = "null_method"

    @property
    def rank(self) -> int:
        """1-based position in the cascade; lower is stricter."""
        return list(MatchMethod).index(self) + 1

    @property
    def is_fuzzy(self) -> bool:
        """Whether the tier accepts a similarity score below 1.0."""
        return self in _FUZZY_METHODS


_FUZZY_METHODS = frozenset({
    MatchMethod.LOOSE_YEAR,
    MatchMethod.LOOSE,
    MatchMethod.LAST_RESORT,
    MatchMethod.NULL_METHOD,
})

_unit_interval = [validators.instance_of(float), validators.ge(0.0), validators.le(1.0)]


@define(frozen=True, slots=True)
class MatchThresholds:
    """Minimum similarity accepted by each fuzzy tier.

    Defaults come from ``settings.matching``.
    """

    loose: float = field(
        factory=lambda: settings.matching.loose_threshold,
        converter=float,
        validator=_unit_interval,
    )
    last_resort: float = field(
        factory=lambda: settings.matching.last_resort_threshold,
        converter=float,
        validator=_unit_interval,
    )
    minimum: float = field(
        factory=lambda: settings.matching.minimum_threshold,
        converter=float,
        validator=_unit_interval,
    )
    prefix_scale: float = field(
        factory=lambda: settings.matching.prefix_scale,
        converter=float,
        validator=validators.ge(0.0),
    )


@define(frozen=True, slots=True)
class MatchResult(Generic[T]):
    """Outcome of a successful cascade run.

    Exact-raw tiers populate ``title``; normalized and fuzzy tiers populate
    ``normalized``. ``year`` and ``episodes`` are only set when the tier
    constrained on them.
    """

    similarity: float
    method: MatchMethod
    result: T
    title: str | None = None
    normalized: str | None = None
    year: int | None = None
    episodes: int | None = None

    @property
    def matched_title(self) -> str | None:
        """The raw or normalized title that produced the match."""
        return self.title if self.title is not None else self.normalized

    def as_dict(
        self,
        result_serializer: Callable[[T], Any] | None = None,
    ) -> dict[str, Any]:
        """Convert to a plain mapping for JSON output."""
        return {
            "similarity": round(self.similarity, 4),
            "method": self.method.value,
            "title": self.title,
            "normalized": self.normalized,
            "year": self.year,
            "episodes": self.episodes,
            "result": (
                result_serializer(self.result) if result_serializer else self.result
            ),
        }
