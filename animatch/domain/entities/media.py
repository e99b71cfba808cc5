"""Media-related domain entities.

Immutable representations of an anime record as seen by the matcher: the
known title variants plus the release year and episode count.
"""

from collections.abc import Mapping
from typing import Any

from attrs import define, field, validators

_optional_str = validators.optional(validators.instance_of(str))
_optional_int = validators.optional(validators.instance_of(int))


def _reject_bool(instance: Any, attribute: Any, value: Any) -> None:
    # bool is an int subclass; a flag is never a year or an episode count
    if isinstance(value, bool):
        raise TypeError(f"'{attribute.name}' must be an int, not bool")


@define(frozen=True, slots=True)
class MediaTitle:
    """Title variants of a single work, as published by a catalog."""

    english: str | None = field(default=None, validator=_optional_str)
    romaji: str | None = field(default=None, validator=_optional_str)
    native: str | None = field(default=None, validator=_optional_str)
    user_preferred: str | None = field(default=None, validator=_optional_str)

    def all_titles(self) -> list[str]:
        """Return every non-empty title in priority order.

        The user-preferred title comes first, followed by the english,
        romaji and native variants. Duplicates are kept.
        """
        candidates = (self.user_preferred, self.english, self.romaji, self.native)
        return [title for title in candidates if title]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MediaTitle":
        """Build from a catalog mapping, accepting camelCase or snake_case keys."""
        if not isinstance(data, Mapping):
            raise TypeError(f"Title must be a mapping, got {type(data).__name__}")
        return cls(
            english=data.get("english"),
            romaji=data.get("romaji"),
            native=data.get("native"),
            user_preferred=data.get("userPreferred", data.get("user_preferred")),
        )

    def as_dict(self) -> dict[str, str | None]:
        """Convert to the catalog mapping shape."""
        return {
            "english": self.english,
            "romaji": self.romaji,
            "native": self.native,
            "userPreferred": self.user_preferred,
        }


def get_all_titles(title: MediaTitle | None) -> list[str]:
    """Return the ordered title set of an optional title object."""
    if title is None:
        return []
    return title.all_titles()


@define(frozen=True, slots=True)
class MediaRecord:
    """A catalog entry or a search query.

    The same shape is used for the record being resolved and for the
    comparable view of each candidate. ``id`` is opaque to the matcher.
    """

    id: Any = field(default=None)
    title: MediaTitle | None = field(
        default=None,
        validator=validators.optional(validators.instance_of(MediaTitle)),
    )
    year: int | None = field(default=None, validator=[_optional_int, _reject_bool])
    episodes: int | None = field(
        default=None, validator=[_optional_int, _reject_bool]
    )

    @classmethod
    def from_string_title(
        cls,
        title: str,
        year: int | None = None,
        episodes: int | None = None,
    ) -> "MediaRecord":
        """Build a query from a single flat title."""
        return cls(title=MediaTitle(english=title), year=year, episodes=episodes)

    @property
    def titles(self) -> list[str]:
        """Ordered, non-empty title variants of this record."""
        return get_all_titles(self.title)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MediaRecord":
        """Build a record from a catalog mapping.

        Raises:
            TypeError: If a field has the wrong type
        """
        if not isinstance(data, Mapping):
            raise TypeError(f"Record must be a mapping, got {type(data).__name__}")

        raw_title = data.get("title")
        match raw_title:
            case None:
                title = None
            case str():
                title = MediaTitle(english=raw_title)
            case _:
                title = MediaTitle.from_dict(raw_title)

        return cls(
            id=data.get("id"),
            title=title,
            year=data.get("year"),
            episodes=data.get("episodes"),
        )

    def as_dict(self) -> dict[str, Any]:
        """Convert to the catalog mapping shape."""
        return {
            "id": self.id,
            "title": self.title.as_dict() if self.title else None,
            "year": self.year,
            "episodes": self.episodes,
        }
