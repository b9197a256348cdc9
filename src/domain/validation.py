"""Normalisation and validation of user-supplied entry and profile fields."""

import math
import re
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from core.exceptions import ValidationError

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_PLAIN_DECIMAL = re.compile(r"^(\d+(\.\d*)?|\.\d+)$")

# Column widths of the profiles and entries tables.
PLACE_MAX_LENGTH = 255
PROFILE_NAME_MAX_LENGTH = 100


def clean_place(value: Any) -> str:
    """Return the trimmed place, rejecting blanks."""
    place = value.strip() if isinstance(value, str) else ""
    if not place:
        raise ValidationError("place", "Place is required")
    if len(place) > PLACE_MAX_LENGTH:
        raise ValidationError("place", f"Place must be at most {PLACE_MAX_LENGTH} characters")
    return place


def clean_notes(value: Any) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationError("notes", "Notes must be text")
    return value.strip()


def parse_entry_date(value: Any) -> str:
    """Parse a calendar date and return it in canonical ``YYYY-MM-DD`` form.

    Accepts ``datetime.date`` instances (but not datetimes, which carry a time
    component) and strings in exactly that format.
    """
    if isinstance(value, datetime):
        raise ValidationError("date", "Date must not include a time")
    if isinstance(value, date):
        return value.isoformat()
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("date", "Date is required")

    text = value.strip()
    if not _ISO_DATE.match(text):
        raise ValidationError("date", f"Date must be YYYY-MM-DD: {text!r}")
    try:
        return date.fromisoformat(text).isoformat()
    except ValueError as e:
        raise ValidationError("date", f"Invalid date: {text!r}") from e


def parse_hours(value: Any) -> float:
    """Parse hours into a finite, non-negative float."""
    if isinstance(value, bool) or value is None:
        raise ValidationError("hours", "Hours are required")

    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise ValidationError("hours", "Hours are required")
        if not _PLAIN_DECIMAL.match(text):
            raise ValidationError("hours", f"Hours must be a plain decimal number: {text!r}")
        hours = float(text)
    elif isinstance(value, (int, float, Decimal)):
        hours = float(value)
    else:
        raise ValidationError("hours", "Hours must be a number")

    if not math.isfinite(hours):
        raise ValidationError("hours", "Hours must be a finite number")
    if hours < 0:
        raise ValidationError("hours", "Hours cannot be negative")
    return hours


def clean_profile_name(value: Any) -> str:
    name = value.strip() if isinstance(value, str) else ""
    if not name:
        raise ValidationError("name", "Profile name is required")
    if len(name) > PROFILE_NAME_MAX_LENGTH:
        raise ValidationError(
            "name", f"Profile name must be at most {PROFILE_NAME_MAX_LENGTH} characters"
        )
    return name
