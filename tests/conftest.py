"""Shared fixtures - a small anime catalog and helpers to build queries."""

import json

import pytest

from animatch.domain.entities import MediaRecord, MediaTitle


def _record(id_, english, romaji, native, preferred, year, episodes):
    return MediaRecord(
        id=id_,
        title=MediaTitle(
            english=english,
            romaji=romaji,
            native=native,
            user_preferred=preferred,
        ),
        year=year,
        episodes=episodes,
    )


@pytest.fixture
def catalog():
    """Eight well-known series with english, romaji, native and preferred titles."""
    return [
        _record(1, "Attack on Titan", "Shingeki no Kyojin", "進撃の巨人",
                "Shingeki no Kyojin", 2013, 25),
        _record(2, "Demon Slayer: Kimetsu no Yaiba", "Kimetsu no Yaiba", "鬼滅の刃",
                "Kimetsu no Yaiba", 2019, 26),
        _record(3, "My Hero Academia Season 2", "Boku no Hero Academia 2nd Season",
                "僕のヒーローアカデミア 第2期", "Boku no Hero Academia 2nd Season",
                2017, 25),
        _record(4, "Steins;Gate", "Steins;Gate", "シュタインズ・ゲート",
                "Steins Gate", 2011, 24),
        _record(5, "Fullmetal Alchemist: Brotherhood",
                "Hagane no Renkinjutsushi: Fullmetal Alchemist",
                "鋼の錬金術師 FULLMETAL ALCHEMIST", "FMA Brotherhood", 2009, 64),
        _record(6, "Naruto Shippuden", "Naruto: Shippuuden", "ナルト 疾風伝",
                "Naruto Shippuuden", 2007, 500),
        _record(7, "One Piece", "One Piece", "ワンピース", "One Piece", 1999, 1000),
        _record(8, "Bleach: Thousand-Year Blood War", "Bleach: Sennen Kessen-hen",
                "BLEACH 千年血戦篇", "Bleach TYBW", 2022, 13),
    ]


@pytest.fixture
def catalog_file(tmp_path, catalog):
    """The catalog fixture written to a JSON file."""
    path = tmp_path / "catalog.json"
    path.write_text(
        json.dumps([record.as_dict() for record in catalog], ensure_ascii=False),
        encoding="utf-8",
    )
    return path
