from __future__ import annotations

import math
from datetime import date, datetime
from typing import Mapping, Optional

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date, parse_local_datetime


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required.")
    return value.strip()


def require_all(form: Mapping[str, Optional[str]], fields: tuple[str, ...], message: str) -> None:
    """Reject the submission with a single message when any field is blank."""
    for name in fields:
        value = form.get(name)
        if value is None or not str(value).strip():
            raise ValidationError(message)


def parse_float(value: Optional[str], field_name: str) -> float:
    value = require_non_empty(value, field_name)
    try:
        number = float(value)
    except ValueError:
        raise ValidationError(f"{field_name} must be a number.")
    if not math.isfinite(number):
        raise ValidationError(f"{field_name} must be a number.")
    return number


def is_ascii_digits(value: str) -> bool:
    return value.isascii() and value.isdecimal()


def parse_positive_int(value: Optional[str], field_name: str) -> int:
    value = require_non_empty(value, field_name)
    if not is_ascii_digits(value) or int(value) <= 0:
        raise ValidationError(f"{field_name} is invalid.")
    return int(value)


def parse_date_field(value: Optional[str], field_name: str) -> date:
    value = require_non_empty(value, field_name)
    try:
        return parse_iso_date(value)
    except ValueError:
        raise ValidationError(f"{field_name} must be a date (YYYY-MM-DD).")


def parse_datetime_field(value: Optional[str], field_name: str) -> datetime:
    value = require_non_empty(value, field_name)
    try:
        return parse_local_datetime(value)
    except ValueError:
        raise ValidationError(f"{field_name} must be a date and time.")
