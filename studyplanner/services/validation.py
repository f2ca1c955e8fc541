from __future__ import annotations

from datetime import date, datetime

from studyplanner.domain.models.entities import TIME_PATTERN

DATE_FMT = "%Y-%m-%d"


class InputError(Exception):
    """Rejected form input; the message is shown to the user as-is."""


def require_text(value: str | None, message: str) -> str:
    text = (value or "").strip()
    if not text:
        raise InputError(message)
    return text


def parse_date(value: str | date | None, *, required: bool = False) -> date | None:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = (value or "").strip()
    if not text:
        if required:
            raise InputError("Please enter a date.")
        return None
    try:
        return datetime.strptime(text, DATE_FMT).date()
    except ValueError as exc:
        raise InputError("Invalid date format. Use YYYY-MM-DD.") from exc


def parse_time(value: str | None) -> str:
    text = (value or "").strip()
    if text and not TIME_PATTERN.match(text):
        raise InputError("Invalid time format. Use HH:MM.")
    return text
