# ABOUTME: Converts raw answer sets and stored JSON objects into BookRecord, and back.
# ABOUTME: Owns the persisted key layout, including sparse localCover and legacy key migration.

import logging
from collections.abc import Mapping
from typing import Any

from booklog.records.types import BookRecord, YearReadKind, year_read_kind

logger = logging.getLogger(__name__)

# Persisted key order for the fields this tool manages.
KNOWN_KEYS = ("title", "author", "isbn", "rating", "yearRead", "localCover")

# Older collections spelled some keys differently.
LEGACY_KEYS = {"ISBN": "isbn"}

_REQUIRED_KEYS = ("title", "author", "isbn", "yearRead")


def _migrate_legacy_keys(answers: Mapping[str, Any]) -> dict[str, Any]:
    """Rename legacy keys to their canonical spelling.

    When both spellings are present the canonical one wins and the legacy
    value is dropped.
    """
    migrated = dict(answers)
    for legacy, canonical in LEGACY_KEYS.items():
        if legacy not in migrated:
            continue
        value = migrated.pop(legacy)
        if canonical in migrated:
            logger.warning("Dropping legacy key %r; %r is already present", legacy, canonical)
        else:
            logger.warning("Migrating legacy key %r to %r", legacy, canonical)
            migrated[canonical] = value
    return migrated


def _coerce_rating(value: Any) -> int | None:
    """Coerce a stored or answered rating to int, or None when blank."""
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ValueError(f"Invalid rating: {value!r}")
    if isinstance(value, int):
        rating = value
    elif isinstance(value, str) and value.strip().lstrip("+-").isdigit():
        rating = int(value.strip())
    else:
        raise ValueError(f"Invalid rating: {value!r}")
    if not 1 <= rating <= 5:
        raise ValueError(f"Rating out of range 1-5: {value!r}")
    return rating


def _coerce_local_cover(value: Any) -> bool:
    """Accept only a JSON boolean for localCover; absent means false."""
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError(f"Invalid localCover: {value!r}")
    return value


def normalize(answers: Mapping[str, Any] | BookRecord) -> BookRecord:
    """Build a BookRecord from an answer set or a stored JSON object.

    Text fields are stripped, the rating is coerced to int (or None when
    blank, and always None for books currently being read), and unknown keys
    are kept aside in `extra`. Passing a BookRecord normalizes its persisted
    form, so normalizing twice gives the same record.

    Raises:
        ValueError: If a required key is missing, the rating is not an integer
            in 1-5, or localCover is not a boolean.
    """
    if isinstance(answers, BookRecord):
        answers = record_to_dict(answers)

    data = _migrate_legacy_keys(answers)
    missing = [key for key in _REQUIRED_KEYS if key not in data]
    if missing:
        raise ValueError(f"Missing field(s): {', '.join(missing)}")

    year_read = str(data["yearRead"]).strip()
    if year_read_kind(year_read) is YearReadKind.CURRENTLY:
        rating = None
    else:
        rating = _coerce_rating(data.get("rating"))

    return BookRecord(
        title=str(data["title"]).strip(),
        author=str(data["author"]).strip(),
        isbn=str(data["isbn"]).strip(),
        year_read=year_read,
        rating=rating,
        local_cover=_coerce_local_cover(data.get("localCover")),
        extra={k: v for k, v in data.items() if k not in KNOWN_KEYS},
    )


def record_to_dict(record: BookRecord) -> dict[str, Any]:
    """Convert a BookRecord to its persisted JSON object.

    A missing rating is written as "" and localCover only appears when true.
    """
    data: dict[str, Any] = {
        "title": record.title,
        "author": record.author,
        "isbn": record.isbn,
        "rating": record.rating if record.rating is not None else "",
        "yearRead": record.year_read,
    }
    if record.local_cover:
        data["localCover"] = True
    for key, value in record.extra.items():
        data.setdefault(key, value)
    return data

