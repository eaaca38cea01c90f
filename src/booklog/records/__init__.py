# ABOUTME: Records package: the BookRecord type, validators, and normalization.
# ABOUTME: Exports the pieces the store and CLI layers build on.

from booklog.records.normalizer import normalize, record_to_dict
from booklog.records.rules import RatingRule, rating_rule
from booklog.records.types import BookRecord, DateFormat, YearReadKind
from booklog.records.validators import FieldValidationError

__all__ = [
    "BookRecord",
    "DateFormat",
    "FieldValidationError",
    "RatingRule",
    "YearReadKind",
    "normalize",
    "rating_rule",
    "record_to_dict",
]
