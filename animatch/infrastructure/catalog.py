"""Catalog file loading.

A catalog is a JSON array of media records, or an object wrapping that array
under ``media`` or ``results`` (the shape returned by common anime APIs).
"""

import json
from pathlib import Path
from typing import Any

from animatch.config import get_logger
from animatch.domain.entities import MediaRecord

logger = get_logger(__name__)

_WRAPPER_KEYS = ("media", "results")


class CatalogError(ValueError):
    """Raised when a catalog file cannot be read or has an invalid shape."""


def _unwrap(payload: Any, path: Path) -> list[Any]:
    if isinstance(payload, dict):
        for key in _WRAPPER_KEYS:
            if isinstance(payload.get(key), list):
                return payload[key]
        raise CatalogError(
            f"{path}: expected a list or an object with one of {list(_WRAPPER_KEYS)}"
        )
    if not isinstance(payload, list):
        raise CatalogError(f"{path}: expected a list of records")
    return payload


def parse_catalog(payload: Any, path: Path | str = "<catalog>") -> list[MediaRecord]:
    """Convert decoded JSON into media records, preserving order."""
    path = Path(path)
    records = []
    for index, item in enumerate(_unwrap(payload, path)):
        try:
            records.append(MediaRecord.from_dict(item))
        except (TypeError, ValueError) as e:
            raise CatalogError(f"{path}: invalid record at index {index}: {e}") from e
    return records


def load_catalog(path: Path | str) -> list[MediaRecord]:
    """Load media records from a JSON catalog file.

    Raises:
        CatalogError: If the file is missing, is not valid JSON, or holds
            malformed records
    """
    path = Path(path)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise CatalogError(f"{path}: cannot read catalog: {e}") from e
    except json.JSONDecodeError as e:
        raise CatalogError(f"{path}: invalid JSON: {e}") from e

    records = parse_catalog(payload, path)
    logger.debug("Loaded {} records from {}", len(records), path)
    return records
