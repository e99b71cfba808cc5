"""Best-match resolution of a query record against a list of candidates.

The cascade runs ten tiers from strictest to loosest and returns the result
of the first tier that finds anything:

1. exact raw title, same year and episode count
2. exact cleaned title, same year and episode count
3. exact raw title, same year
4. exact cleaned title, same year
5. exact raw title
6. exact cleaned title
7. sanitized similarity >= loose threshold, same year
8. sanitized similarity >= loose threshold
9. sanitized similarity >= last-resort threshold
10. highest sanitized similarity overall, kept only if >= minimum threshold

Exact tiers return the first candidate (in input order) with the first
matching query title. Fuzzy tiers keep the highest score; ties keep the
first pair seen. Every fuzzy tier rescans the whole candidate list.
"""

from collections.abc import Callable, Iterator, Sequence
import copy
from functools import partial
from typing import Any, Generic, TypeVar

from attrs import define

from animatch.config import get_logger
from animatch.domain.entities.media import get_all_titles

from .algorithms import jaro_winkler_distance
from .normalization import clean_title, sanitize_title
from .protocols import ComparableMedia, SimilarityFunction
from .types import MatchMethod, MatchResult, MatchThresholds

logger = get_logger(__name__)

T = TypeVar("T")


def _identity(candidate: Any) -> Any:
    return candidate


def _normalized_titles(
    titles: list[str], normalize: Callable[[str | None], str | None]
) -> list[str]:
    """Normalize titles, dropping those that normalize to nothing."""
    return [normalized for normalized in map(normalize, titles) if normalized]


@define(frozen=True, slots=True)
class _CandidateView(Generic[T]):
    """Comparable fields of one candidate, normalized once per cascade run."""

    candidate: T
    year: int | None
    episodes: int | None
    titles: list[str]
    cleaned: list[str]
    sanitized: list[str]

    @classmethod
    def build(cls, candidate: T, data: ComparableMedia) -> "_CandidateView[T]":
        titles = get_all_titles(data.title)
        return cls(
            candidate=candidate,
            year=data.year,
            episodes=data.episodes,
            titles=titles,
            cleaned=_normalized_titles(titles, clean_title),
            sanitized=_normalized_titles(titles, sanitize_title),
        )


@define(frozen=True, slots=True)
class _Query:
    """Titles of the record being resolved, at each normalization depth."""

    titles: list[str]
    cleaned: list[str]
    sanitized: list[str]
    year: int | None
    episodes: int | None


def _build_result(
    view: _CandidateView[T],
    method: MatchMethod,
    similarity: float = 1.0,
    *,
    title: str | None = None,
    normalized: str | None = None,
    year: int | None = None,
    episodes: int | None = None,
) -> MatchResult[T]:
    return MatchResult(
        similarity=similarity,
        method=method,
        result=copy.deepcopy(view.candidate),
        title=title,
        normalized=normalized,
        year=year,
        episodes=episodes,
    )


def _gated(
    views: Sequence[_CandidateView[T]],
    year: int | None = None,
    episodes: int | None = None,
) -> Iterator[_CandidateView[T]]:
    """Yield candidates whose year and episode count equal the given ones."""
    for view in views:
        if year is not None and view.year != year:
            continue
        if episodes is not None and view.episodes != episodes:
            continue
        yield view


def _exact_match(
    views: Sequence[_CandidateView[T]],
    query: _Query,
    method: MatchMethod,
    *,
    normalized: bool,
    year: int | None = None,
    episodes: int | None = None,
) -> MatchResult[T] | None:
    """Return the first candidate holding one of the query titles verbatim."""
    query_titles = query.cleaned if normalized else query.titles

    for view in _gated(views, year, episodes):
        candidate_titles = view.cleaned if normalized else view.titles
        for query_title in query_titles:
            if query_title in candidate_titles:
                return _build_result(
                    view,
                    method,
                    title=None if normalized else query_title,
                    normalized=query_title if normalized else None,
                    year=year,
                    episodes=episodes,
                )
    return None


def _scored_pairs(
    views: Sequence[_CandidateView[T]] | Iterator[_CandidateView[T]],
    query: _Query,
    similarity: SimilarityFunction,
) -> Iterator[tuple[float, _CandidateView[T], str]]:
    """Score every (candidate, query title, candidate title) triple in scan order."""
    for view in views:
        for query_title in query.sanitized:
            for candidate_title in view.sanitized:
                yield similarity(query_title, candidate_title), view, query_title


def _loose_match(
    views: Sequence[_CandidateView[T]],
    query: _Query,
    method: MatchMethod,
    threshold: float,
    similarity: SimilarityFunction,
    *,
    year: int | None = None,
) -> MatchResult[T] | None:
    """Return the best-scoring pair at or above ``threshold``; ties keep the first."""
    best: tuple[float, _CandidateView[T], str] | None = None

    for score, view, query_title in _scored_pairs(
        _gated(views, year), query, similarity
    ):
        if score >= threshold and (best is None or score > best[0]):
            best = (score, view, query_title)

    if best is None:
        return None

    score, view, query_title = best
    return _build_result(view, method, score, normalized=query_title, year=year)


def _closest_match(
    views: Sequence[_CandidateView[T]],
    query: _Query,
    minimum: float,
    similarity: SimilarityFunction,
) -> MatchResult[T] | None:
    """Return the single highest-scoring pair if it reaches ``minimum``."""
    highest = 0.0
    best: tuple[_CandidateView[T], str] | None = None

    for score, view, query_title in _scored_pairs(views, query, similarity):
        if score > highest:
            highest = score
            best = (view, query_title)

    if best is None or highest < minimum:
        logger.debug(
            "Closest title scored {:.4f}, below minimum {:.2f}", highest, minimum
        )
        return None

    view, query_title = best
    return _build_result(
        view, MatchMethod.NULL_METHOD, highest, normalized=query_title
    )


# (method, compares cleaned titles, gated on year, gated on episodes)
_EXACT_TIERS = (
    (MatchMethod.EXACT_YEAR_EPISODE_RAW, False, True, True),
    (MatchMethod.EXACT_YEAR_EPISODE_NORMALIZED, True, True, True),
    (MatchMethod.EXACT_YEAR_RAW, False, True, False),
    (MatchMethod.EXACT_YEAR_NORMALIZED, True, True, False),
    (MatchMethod.EXACT, False, False, False),
    (MatchMethod.EXACT_NORMALIZED, True, False, False),
)


def _found(result: MatchResult[T]) -> MatchResult[T]:
    logger.debug(
        "Matched {!r} via {} (similarity {:.4f})",
        result.matched_title,
        result.method,
        result.similarity,
    )
    return result


def find_best_match(
    query: ComparableMedia,
    candidates: Sequence[T],
    extract: Callable[[T], ComparableMedia] = _identity,
    *,
    thresholds: MatchThresholds | None = None,
    similarity: SimilarityFunction | None = None,
) -> MatchResult[T] | None:
    """Find the candidate that best matches the query.

    Args:
        query: Record being resolved (titles plus optional year and episodes)
        candidates: Candidates in priority order; order decides ties
        extract: Pure accessor returning the comparable view of a candidate.
            Defaults to identity, for lists of ``MediaRecord``.
        thresholds: Fuzzy tier thresholds, defaults to configured values
        similarity: Title scorer for fuzzy tiers, defaults to Jaro-Winkler
            with the configured prefix scale

    Returns:
        MatchResult holding a copy of the matched candidate, or None when no
        tier matched
    """
    if not candidates:
        logger.debug("No candidates to match against")
        return None

    titles = get_all_titles(query.title)
    if not titles:
        logger.debug("Query has no titles")
        return None

    search = _Query(
        titles=titles,
        cleaned=_normalized_titles(titles, clean_title),
        sanitized=_normalized_titles(titles, sanitize_title),
        year=query.year,
        episodes=query.episodes,
    )
    if not search.sanitized:
        logger.debug("No query title survived sanitization: {}", titles)
        return None

    thresholds = thresholds or MatchThresholds()
    score = similarity or partial(jaro_winkler_distance, p=thresholds.prefix_scale)

    views = [
        _CandidateView.build(candidate, extract(candidate)) for candidate in candidates
    ]
    year, episodes = search.year, search.episodes

    for method, normalized, uses_year, uses_episodes in _EXACT_TIERS:
        if (uses_year and year is None) or (uses_episodes and episodes is None):
            continue
        result = _exact_match(
            views,
            search,
            method,
            normalized=normalized,
            year=year if uses_year else None,
            episodes=episodes if uses_episodes else None,
        )
        if result is not None:
            return _found(result)

    loose_tiers = [
        (MatchMethod.LOOSE_YEAR, thresholds.loose, True),
        (MatchMethod.LOOSE, thresholds.loose, False),
        (MatchMethod.LAST_RESORT, thresholds.last_resort, False),
    ]
    for method, threshold, uses_year in loose_tiers:
        if uses_year and year is None:
            continue
        result = _loose_match(
            views,
            search,
            method,
            threshold,
            score,
            year=year if uses_year else None,
        )
        if result is not None:
            return _found(result)

    result = _closest_match(views, search, thresholds.minimum, score)
    if result is not None:
        return _found(result)

    logger.debug("No match found for {}", titles)
    return None
