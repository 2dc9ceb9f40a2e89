from __future__ import annotations

from typing import Optional

from ..core.exceptions import MissingInputError, ValidationError
from .datetime_utils import parse_iso_date


def require_input(value: Optional[str], field_name: str) -> str:
    if value is None or not value.strip():
        raise MissingInputError(f"Missing required field: {field_name}")
    return value.strip()


def require_iso_date(value: Optional[str], field_name: str = "date") -> str:
    value = require_input(value, field_name)
    try:
        parse_iso_date(value)
    except ValueError:
        raise ValidationError(f"{field_name} must be in YYYY-MM-DD form")
    return value


def parse_int(value: Optional[str], field_name: str) -> int:
    value = require_input(value, field_name)
    try:
        return int(value)
    except ValueError:
        raise ValidationError(f"{field_name} must be an integer")
