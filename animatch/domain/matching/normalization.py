"""Title normalization for comparison.

Two depths are provided:

- ``clean_title`` folds formatting only (Unicode compatibility forms,
  punctuation, whitespace, length) and keeps case.
- ``sanitize_title`` additionally lower-cases, drops season/part/format noise,
  unifies common romanization spellings and strips diacritics, then cleans.

Both are pure, deterministic and propagate ``None``. The sanitize pipeline is
composed once at import time from small transforms, and all patterns are
compiled at module load.
"""

import re
import unicodedata

from toolz import compose_left

from animatch.config import settings

# Words describing a season, split cour or special rather than a distinct work
_SEASON_WORDS = ("season", "cour", "part", "chapter", "special")

_NUMBERED_SEASON_RE = re.compile(
    r"(\d+)(?:th|rd|nd|st)?\s*(?:" + "|".join(_SEASON_WORDS) + r")\b"
)
_SEASON_WORD_RE = re.compile(r"\b(?:" + "|".join(_SEASON_WORDS) + r")\b")

# Release and format annotations
_FORMAT_RE = re.compile(
    r"\b(?:uncut|uncensored|dub(?:bed)?|censored|sub(?:bed)?|the final chapters)\b"
    r"|\([^)]*\)"
    r"|\bBD\b"
    r"|\(TV\)",
    re.IGNORECASE,
)

# Romanization variants of the same sound, applied as plain substrings
SPELLING_UNIFICATIONS: tuple[tuple[str, str], ...] = (
    ("yuu", "yu"),
    ("ouh", "oh"),
    ("yaa", "ya"),
)


# Vowel signs and other combining marks are part of the word in Indic and Thai scripts
_WORD_MARK_CATEGORIES = frozenset({"Mn", "Mc"})


def _is_word_char(ch: str) -> bool:
    return (
        ch.isalnum()
        or ch.isspace()
        or unicodedata.category(ch) in _WORD_MARK_CATEGORIES
    )


def _fold_punctuation(text: str) -> str:
    """Replace punctuation and symbols with spaces, keeping letters and their marks."""
    return "".join(ch if _is_word_char(ch) else " " for ch in text)


def clean_title(title: str | None, max_length: int | None = None) -> str | None:
    """Clean and normalize a title for formatting-insensitive comparison.

    Args:
        title: Title to clean, or None
        max_length: Character cap, defaults to ``settings.matching.max_title_length``

    Returns:
        NFKC-normalized title with punctuation folded to spaces, whitespace
        collapsed and trimmed, truncated to ``max_length`` characters.
    """
    if title is None:
        return None

    limit = settings.matching.max_title_length if max_length is None else max_length
    folded = _fold_punctuation(unicodedata.normalize("NFKC", title))
    return " ".join(folded.split())[:limit]


# === Sanitize steps ===


def _singularize_chapters(text: str) -> str:
    return text.replace("chapters", "chapter")


def _collapse_numbered_seasons(text: str) -> str:
    # "2nd season" and "2 season" both become a bare "2"
    return _NUMBERED_SEASON_RE.sub(r" \1 ", text)


def _remove_season_words(text: str) -> str:
    return _SEASON_WORD_RE.sub("", text)


def _unify_spellings(text: str) -> str:
    for variant, canonical in SPELLING_UNIFICATIONS:
        text = text.replace(variant, canonical)
    return text


def _remove_format_annotations(text: str) -> str:
    return _FORMAT_RE.sub("", text)


def strip_diacritics(text: str) -> str:
    """Decompose to NFD and drop combining marks, keeping base letters."""
    return "".join(
        ch
        for ch in unicodedata.normalize("NFD", text)
        if not unicodedata.category(ch).startswith("M")
    )


_sanitize_pipeline = compose_left(
    str.lower,
    _singularize_chapters,
    _collapse_numbered_seasons,
    _remove_season_words,
    _fold_punctuation,
    _unify_spellings,
    _remove_format_annotations,
    strip_diacritics,
    clean_title,
)


def sanitize_title(title: str | None) -> str | None:
    """Sanitize a title by removing words and characters that do not identify the work.

    The result may be an empty string when the title held nothing but noise;
    callers filter empty results before comparing.

    Example:
        >>> sanitize_title("Boku no Hero Academia 2nd Season (Dubbed)")
        'boku no hero academia 2'
    """
    if title is None:
        return None
    return _sanitize_pipeline(title)
