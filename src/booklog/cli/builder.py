# ABOUTME: Interactive record builder that asks for one book's fields in order.
# ABOUTME: Which questions follow yearRead is driven by the rating rule table.

from collections.abc import Mapping
from datetime import date
from functools import partial
from typing import Any

from booklog.cli.prompts import ask, ask_yes_no
from booklog.records.rules import RatingRule, rating_rule
from booklog.records.types import (
    CURRENTLY,
    DEFAULT_DATE_FORMAT,
    UNDATED,
    DateFormat,
    YearReadKind,
    year_read_kind,
)
from booklog.records.validators import (
    CURRENTLY_CODE,
    CUSTOM_DATE_CODE,
    TODAY_CODE,
    UNDATED_CODE,
    validate_author,
    validate_date,
    validate_isbn,
    validate_rating,
    validate_title,
    validate_year_read,
)

_SENTINEL_CODES = {
    CURRENTLY_CODE: CURRENTLY,
    UNDATED_CODE: UNDATED,
}

_RATING_PROMPTS = {
    RatingRule.OPTIONAL: "Rating (1-5 or leave blank)",
    RatingRule.REQUIRED: "Rating (1-5)",
}


def _text_default(defaults: Mapping[str, Any], key: str) -> str:
    value = defaults.get(key)
    return "" if value is None else str(value)


class RecordBuilder:
    """Collects the answers for one book from the operator.

    The builder holds no state between calls: everything a re-edit should
    remember is passed back in through `defaults`.
    """

    def __init__(self, *, today: date, date_format: DateFormat = DEFAULT_DATE_FORMAT) -> None:
        self._today = today
        self._date_format = date_format

    @property
    def today(self) -> str:
        """Today's date in the active layout."""
        return self._date_format.format(self._today)

    def build(self, defaults: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Ask every applicable question and return the answer set.

        Args:
            defaults: Answers from a previous pass, used as each prompt's default.

        Returns:
            A dict keyed like the persisted record: title, author, isbn,
            yearRead, rating ("" or an int), localCover.
        """
        defaults = defaults or {}
        answers: dict[str, Any] = {}

        answers["title"] = ask("Title", validate_title, _text_default(defaults, "title"))
        answers["author"] = ask("Author", validate_author, _text_default(defaults, "author"))
        answers["isbn"] = ask(
            "ISBN (13 digits)", validate_isbn, _text_default(defaults, "isbn")
        )
        answers["yearRead"] = self._ask_year_read(_text_default(defaults, "yearRead"))

        rule = rating_rule(answers["yearRead"])
        if rule is RatingRule.SKIPPED:
            answers["rating"] = ""
        else:
            rating = ask(
                _RATING_PROMPTS[rule],
                partial(validate_rating, year_read=answers["yearRead"]),
                _text_default(defaults, "rating"),
            )
            answers["rating"] = "" if rating is None else rating

        answers["localCover"] = ask_yes_no(
            "Local cover image?", default=bool(defaults.get("localCover", False))
        )
        return answers

    def _ask_year_read(self, prior: str) -> str:
        """Ask for yearRead and resolve menu codes to a stored value."""
        label = self._date_format.label
        choice = ask(
            f"Year read ({TODAY_CODE} = today, {CURRENTLY_CODE} = currently, "
            f"{UNDATED_CODE} = undated, {CUSTOM_DATE_CODE} = other date, or {label})",
            partial(validate_year_read, date_format=self._date_format),
            prior or TODAY_CODE,
        )

        if choice == TODAY_CODE:
            return self.today
        if choice in _SENTINEL_CODES:
            return _SENTINEL_CODES[choice]
        if choice == CUSTOM_DATE_CODE:
            dated_prior = prior and year_read_kind(prior) is YearReadKind.DATED
            return ask(
                f"Date read ({label})",
                partial(validate_date, date_format=self._date_format),
                prior if dated_prior else self.today,
            )
        return choice
