"""Tests for media domain entities."""

import attrs
import pytest

from animatch.domain.entities import MediaRecord, MediaTitle, get_all_titles


class TestMediaTitle:
    """Test cases for title variants."""

    def test_all_titles_priority_order(self):
        """Test that the preferred title comes first, then english, romaji, native."""
        title = MediaTitle(
            english="Attack on Titan",
            romaji="Shingeki no Kyojin",
            native="進撃の巨人",
            user_preferred="AoT",
        )
        assert title.all_titles() == [
            "AoT",
            "Attack on Titan",
            "Shingeki no Kyojin",
            "進撃の巨人",
        ]

    def test_all_titles_skips_missing_and_empty(self):
        """Test that None and empty strings are excluded."""
        title = MediaTitle(english="", romaji="One Piece", native=None)
        assert title.all_titles() == ["One Piece"]

    def test_duplicates_are_kept(self):
        """Test that repeated variants are harmless and preserved."""
        title = MediaTitle(english="One Piece", romaji="One Piece")
        assert title.all_titles() == ["One Piece", "One Piece"]

    def test_get_all_titles_of_missing_title(self):
        """Test that a missing title object yields an empty title set."""
        assert get_all_titles(None) == []

    def test_rejects_non_string_title(self):
        """Test attrs validation of title variants."""
        with pytest.raises(TypeError):
            MediaTitle(english=42)

    def test_from_dict_accepts_both_key_styles(self):
        """Test camelCase and snake_case preferred-title keys."""
        camel = MediaTitle.from_dict({"english": "A", "userPreferred": "B"})
        snake = MediaTitle.from_dict({"english": "A", "user_preferred": "B"})
        assert camel == snake
        assert camel.user_preferred == "B"


class TestMediaRecord:
    """Test cases for records and queries."""

    def test_from_string_title(self):
        """Test the flat-title convenience constructor."""
        record = MediaRecord.from_string_title("One Piece", year=1999, episodes=1000)

        assert record.id is None
        assert record.title == MediaTitle(english="One Piece")
        assert record.titles == ["One Piece"]
        assert record.year == 1999
        assert record.episodes == 1000

    def test_is_immutable(self):
        """Test that records are frozen."""
        record = MediaRecord.from_string_title("One Piece")
        with pytest.raises(attrs.exceptions.FrozenInstanceError):
            record.year = 2000

    @pytest.mark.parametrize("field_name", ["year", "episodes"])
    def test_rejects_non_integer_metadata(self, field_name):
        """Test that year and episodes must be integers."""
        with pytest.raises(TypeError):
            MediaRecord(**{field_name: "2013"})
        with pytest.raises(TypeError):
            MediaRecord(**{field_name: True})

    def test_dict_round_trip(self):
        """Test conversion to and from the catalog mapping shape."""
        record = MediaRecord(
            id="abc",
            title=MediaTitle(english="Steins;Gate", user_preferred="Steins Gate"),
            year=2011,
            episodes=24,
        )
        data = record.as_dict()

        assert data["title"]["userPreferred"] == "Steins Gate"
        assert MediaRecord.from_dict(data) == record

    def test_from_dict_with_plain_string_title(self):
        """Test that a bare string title is read as the english title."""
        record = MediaRecord.from_dict({"id": 7, "title": "One Piece"})
        assert record.title == MediaTitle(english="One Piece")

    def test_from_dict_without_title(self):
        """Test records with no title at all."""
        record = MediaRecord.from_dict({"id": 7, "year": 1999})
        assert record.title is None
        assert record.titles == []

    def test_from_dict_rejects_non_mapping(self):
        """Test that list entries must be objects."""
        with pytest.raises(TypeError):
            MediaRecord.from_dict(["One Piece"])
