# ABOUTME: Pure per-field validators for operator input.
# ABOUTME: Each returns the normalized value or raises FieldValidationError with a message.

import re
from datetime import datetime

from booklog.records.rules import RatingRule, rating_rule
from booklog.records.types import CURRENTLY, DEFAULT_DATE_FORMAT, UNDATED, DateFormat

_ISBN_RE = re.compile(r"[0-9]{13}")
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

# Codes accepted by the yearRead prompt.
TODAY_CODE = "1"
CURRENTLY_CODE = "2"
UNDATED_CODE = "3"
CUSTOM_DATE_CODE = "4"

YEAR_READ_CODES = {
    TODAY_CODE: "today",
    CURRENTLY_CODE: CURRENTLY,
    UNDATED_CODE: UNDATED,
    CUSTOM_DATE_CODE: "other date",
}

_YES = frozenset({"y", "yes"})
_NO = frozenset({"n", "no"})


class FieldValidationError(ValueError):
    """Raised when operator input for a field is rejected."""


def _validate_required(raw: str, label: str) -> str:
    value = raw.strip()
    if not value:
        raise FieldValidationError(f"{label} is required.")
    return value


def validate_title(raw: str) -> str:
    return _validate_required(raw, "Title")


def validate_author(raw: str) -> str:
    return _validate_required(raw, "Author")


def validate_isbn(raw: str) -> str:
    """Accept exactly 13 ASCII digits, nothing else."""
    if not _ISBN_RE.fullmatch(raw):
        raise FieldValidationError("ISBN must be a 13-character string of numbers.")
    return raw


def validate_date(raw: str, date_format: DateFormat = DEFAULT_DATE_FORMAT) -> str:
    """Accept a calendar date written in the active layout."""
    value = raw.strip()
    message = f"Enter a date in the format {date_format.label}."
    if not date_format.pattern.fullmatch(value):
        raise FieldValidationError(message)
    try:
        datetime.strptime(value, date_format.strftime)
    except ValueError as exc:
        raise FieldValidationError(message) from exc
    return value


def validate_year_read(raw: str, date_format: DateFormat = DEFAULT_DATE_FORMAT) -> str:
    """Accept a yearRead menu code, a sentinel name, or an explicit date.

    The value is returned unresolved; turning "1" into today's date is the
    caller's job since validators know nothing about the clock.
    """
    value = raw.strip().lower()
    if value in YEAR_READ_CODES or value in (CURRENTLY, UNDATED):
        return value
    try:
        return validate_date(value, date_format)
    except FieldValidationError as exc:
        raise FieldValidationError(
            f"Enter '{TODAY_CODE}' for today's date, '{CURRENTLY_CODE}' for 'currently', "
            f"'{UNDATED_CODE}' for 'undated', '{CUSTOM_DATE_CODE}' to type a date, "
            f"or a date in the format {date_format.label}."
        ) from exc


def validate_rating(raw: str, year_read: str) -> int | None:
    """Accept a 1-5 integer, or blank when the yearRead allows no rating.

    Returns None for an accepted blank.
    """
    rule = rating_rule(year_read)
    value = raw.strip()
    if not value:
        if rule is RatingRule.REQUIRED:
            raise FieldValidationError("A rating between 1 and 5 is required for undated books.")
        return None
    if not _INTEGER_RE.fullmatch(value) or not 1 <= int(value) <= 5:
        raise FieldValidationError("Rating must be a number between 1 and 5.")
    return int(value)


def validate_yes_no(raw: str) -> bool:
    """Case-insensitive y/n (or yes/no) to a bool."""
    value = raw.strip().lower()
    if value in _YES:
        return True
    if value in _NO:
        return False
    raise FieldValidationError("Please answer 'y' or 'n'.")
