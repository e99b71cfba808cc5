"""Core domain entities representing anime catalog records."""

from .media import MediaRecord, MediaTitle, get_all_titles

__all__ = [
    "MediaRecord",
    "MediaTitle",
    "get_all_titles",
]
