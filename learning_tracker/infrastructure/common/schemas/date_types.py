"""Date field types accepting only ISO calendar dates (YYYY-MM-DD)."""

import re
from datetime import date
from typing import Annotated

from pydantic import BeforeValidator, PlainSerializer

ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_iso_date(value: object) -> date:
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not ISO_DATE_PATTERN.match(value):
        raise ValueError("date must be an ISO date string (YYYY-MM-DD)")
    return date.fromisoformat(value)


def _parse_optional_iso_date(value: object) -> date | None:
    # Forms submit an empty string when no target date is picked.
    if value is None or value == "":
        return None
    return _parse_iso_date(value)


def _serialize_date(value: date | None) -> str | None:
    return value.isoformat() if value is not None else None


IsoDate = Annotated[date, BeforeValidator(_parse_iso_date), PlainSerializer(_serialize_date)]
OptionalIsoDate = Annotated[
    date | None, BeforeValidator(_parse_optional_iso_date), PlainSerializer(_serialize_date)
]
