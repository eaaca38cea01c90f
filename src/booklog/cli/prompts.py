# ABOUTME: Thin wrappers around click.prompt that apply a field validator.
# ABOUTME: Rejected input is reported inline by Click and the same prompt is asked again.

from collections.abc import Callable
from typing import Any

import click

from booklog.records.validators import FieldValidationError, validate_yes_no


def _as_value_proc(validator: Callable[[str], Any]) -> Callable[[str], Any]:
    """Adapt a validator so Click re-prompts with its message on rejection."""

    def value_proc(raw: str) -> Any:
        try:
            return validator(raw)
        except FieldValidationError as exc:
            raise click.BadParameter(str(exc)) from exc

    return value_proc


def ask(text: str, validator: Callable[[str], Any], default: str | None = None) -> Any:
    """Prompt until the validator accepts, returning its normalized value.

    A default of "" lets a blank answer through to the validator; None makes
    Click keep asking until something is typed.
    """
    return click.prompt(
        text,
        default=default,
        show_default=bool(default),
        value_proc=_as_value_proc(validator),
    )


def ask_yes_no(text: str, default: bool = False) -> bool:
    """Prompt for y/n and return a bool."""
    return click.prompt(
        f"{text} (y/n)",
        default="y" if default else "n",
        value_proc=_as_value_proc(validate_yes_no),
    )
