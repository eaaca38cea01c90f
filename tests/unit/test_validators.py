# ABOUTME: Unit tests for the per-field input validators.
# ABOUTME: Covers required text, ISBN shape, dates, yearRead codes, ratings, and y/n answers.

import pytest

from booklog.records.types import DATE_FORMATS
from booklog.records.validators import (
    FieldValidationError,
    validate_author,
    validate_date,
    validate_isbn,
    validate_rating,
    validate_title,
    validate_year_read,
    validate_yes_no,
)

SLASHED = DATE_FORMATS["yyyy/mm/dd"]


class TestRequiredText:
    """Tests for title and author validation."""

    def test_title_is_stripped(self) -> None:
        """Surrounding whitespace is removed from an accepted title."""
        assert validate_title("  Dune ") == "Dune"

    def test_blank_title_rejected(self) -> None:
        """A whitespace-only title is rejected with a clear message."""
        with pytest.raises(FieldValidationError, match="Title is required."):
            validate_title("   ")

    def test_empty_author_rejected(self) -> None:
        """An empty author is rejected."""
        with pytest.raises(FieldValidationError, match="Author is required."):
            validate_author("")


class TestValidateIsbn:
    """Tests for the 13-digit identifier check."""

    def test_accepts_thirteen_digits(self) -> None:
        assert validate_isbn("1234567890123") == "1234567890123"

    @pytest.mark.parametrize(
        "raw",
        ["123", "12345678901234", "abcdefghijklm", "978-0441013593", "", " 9780441013593"],
    )
    def test_rejects_other_shapes(self, raw: str) -> None:
        """Anything other than exactly 13 ASCII digits is rejected."""
        with pytest.raises(FieldValidationError, match="13-character"):
            validate_isbn(raw)

    def test_rejects_non_ascii_digits(self) -> None:
        """Unicode digits from other scripts do not count."""
        with pytest.raises(FieldValidationError):
            validate_isbn("١٢٣٤٥٦٧٨٩٠١٢٣")


class TestValidateDate:
    """Tests for explicit date validation."""

    def test_accepts_dashed_date(self) -> None:
        assert validate_date("2023-01-02") == "2023-01-02"

    def test_rejects_wrong_layout(self) -> None:
        """A slashed date is rejected under the dashed layout and the message names it."""
        with pytest.raises(FieldValidationError, match="yyyy-mm-dd"):
            validate_date("2023/01/02")

    def test_slashed_layout(self) -> None:
        """The slashed layout accepts slashes and rejects dashes."""
        assert validate_date("2023/01/02", SLASHED) == "2023/01/02"
        with pytest.raises(FieldValidationError, match="yyyy/mm/dd"):
            validate_date("2023-01-02", SLASHED)

    def test_rejects_impossible_date(self) -> None:
        """A well-shaped but impossible date is rejected."""
        with pytest.raises(FieldValidationError):
            validate_date("2023-13-45")


class TestValidateYearRead:
    """Tests for the yearRead prompt input."""

    @pytest.mark.parametrize("code", ["1", "2", "3", "4"])
    def test_accepts_menu_codes(self, code: str) -> None:
        assert validate_year_read(code) == code

    def test_accepts_sentinel_names(self) -> None:
        """Previously resolved sentinels are valid input on a re-edit."""
        assert validate_year_read("currently") == "currently"
        assert validate_year_read("Undated") == "undated"

    def test_accepts_explicit_date(self) -> None:
        assert validate_year_read("2022-12-31") == "2022-12-31"

    def test_rejects_other_input(self) -> None:
        """Unknown codes and blank input are rejected with the menu in the message."""
        with pytest.raises(FieldValidationError, match="'1' for today's date"):
            validate_year_read("5")
        with pytest.raises(FieldValidationError):
            validate_year_read("")


class TestValidateRating:
    """Tests for rating validation against the yearRead state."""

    @pytest.mark.parametrize("raw,expected", [("1", 1), ("3", 3), ("5", 5), (" 4 ", 4)])
    def test_accepts_one_to_five(self, raw: str, expected: int) -> None:
        assert validate_rating(raw, "2024-03-14") == expected

    def test_blank_allowed_for_dated_book(self) -> None:
        """A dated book may be left unrated."""
        assert validate_rating("", "2024-03-14") is None

    @pytest.mark.parametrize("raw", ["0", "6", "-1", "3.5", "abc", "4.0"])
    def test_rejects_out_of_range_or_non_integer(self, raw: str) -> None:
        with pytest.raises(FieldValidationError, match="between 1 and 5"):
            validate_rating(raw, "2024-03-14")

    def test_blank_rejected_for_undated_book(self) -> None:
        """An undated book must carry a rating."""
        with pytest.raises(FieldValidationError, match="required"):
            validate_rating("", "undated")

    def test_undated_accepts_valid_rating(self) -> None:
        assert validate_rating("2", "undated") == 2


class TestValidateYesNo:
    """Tests for y/n answers."""

    @pytest.mark.parametrize("raw", ["y", "Y", "yes", "YES"])
    def test_yes(self, raw: str) -> None:
        assert validate_yes_no(raw) is True

    @pytest.mark.parametrize("raw", ["n", "N", "no"])
    def test_no(self, raw: str) -> None:
        assert validate_yes_no(raw) is False

    def test_rejects_other_answers(self) -> None:
        with pytest.raises(FieldValidationError, match="'y' or 'n'"):
            validate_yes_no("maybe")
