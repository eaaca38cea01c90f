# ABOUTME: Core data structures for reading-log entries.
# ABOUTME: BookRecord is the unit persisted in a collection; YearReadKind classifies yearRead.

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

CURRENTLY = "currently"
UNDATED = "undated"


class YearReadKind(Enum):
    """What a yearRead value means: a concrete date or one of the two sentinels."""

    DATED = "dated"
    CURRENTLY = "currently"
    UNDATED = "undated"


def year_read_kind(year_read: str) -> YearReadKind:
    """Classify a resolved yearRead value."""
    if year_read == CURRENTLY:
        return YearReadKind.CURRENTLY
    if year_read == UNDATED:
        return YearReadKind.UNDATED
    return YearReadKind.DATED


@dataclass(frozen=True)
class DateFormat:
    """A supported yearRead date layout, e.g. yyyy-mm-dd."""

    label: str
    strftime: str
    pattern: re.Pattern[str]

    def format(self, value: Any) -> str:
        """Render a date/datetime in this layout."""
        return value.strftime(self.strftime)


DATE_FORMATS: dict[str, DateFormat] = {
    "yyyy-mm-dd": DateFormat("yyyy-mm-dd", "%Y-%m-%d", re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")),
    "yyyy/mm/dd": DateFormat("yyyy/mm/dd", "%Y/%m/%d", re.compile(r"[0-9]{4}/[0-9]{2}/[0-9]{2}")),
}

DEFAULT_DATE_FORMAT = DATE_FORMATS["yyyy-mm-dd"]


@dataclass
class BookRecord:
    """One book in the reading log.

    `rating` is None when no rating was given. `extra` carries any keys found
    on a stored entry that this tool does not manage, so they survive a
    load/save cycle untouched.
    """

    title: str
    author: str
    isbn: str
    year_read: str
    rating: int | None = None
    local_cover: bool = False
    extra: dict[str, Any] = field(default_factory=dict)

    @property
    def year_read_kind(self) -> YearReadKind:
        return year_read_kind(self.year_read)

    @property
    def rating_display(self) -> str:
        """Rating as shown to the operator, blank when unrated."""
        return str(self.rating) if self.rating is not None else ""
