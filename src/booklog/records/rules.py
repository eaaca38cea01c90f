# ABOUTME: Decision table for which follow-up questions depend on yearRead.
# ABOUTME: Maps each YearReadKind to whether a rating is skipped, optional, or required.

from enum import Enum

from booklog.records.types import YearReadKind, year_read_kind


class RatingRule(Enum):
    """How the rating question behaves for a given yearRead."""

    SKIPPED = "skipped"
    OPTIONAL = "optional"
    REQUIRED = "required"


RATING_RULES: dict[YearReadKind, RatingRule] = {
    YearReadKind.DATED: RatingRule.OPTIONAL,
    YearReadKind.CURRENTLY: RatingRule.SKIPPED,
    YearReadKind.UNDATED: RatingRule.REQUIRED,
}


def rating_rule(year_read: str) -> RatingRule:
    """Look up the rating rule for a resolved yearRead value."""
    return RATING_RULES[year_read_kind(year_read)]
