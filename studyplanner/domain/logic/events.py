from __future__ import annotations

import calendar
from collections import defaultdict
from datetime import date
from typing import Iterable

from studyplanner.domain.models.entities import Event

UPCOMING_LIMIT = 5
WEEKDAY_HEADERS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]

_sunday_first = calendar.Calendar(firstweekday=calendar.SUNDAY)


def _sort_key(event: Event) -> tuple[date, str]:
    return event.date, event.time or ""


def group_by_day(events: Iterable[Event]) -> dict[date, list[Event]]:
    """Events keyed by their day, each day ordered by time."""
    grouped: dict[date, list[Event]] = defaultdict(list)
    for event in sorted(events, key=_sort_key):
        grouped[event.date].append(event)
    return dict(grouped)


def upcoming_events(events: Iterable[Event], today: date | None = None, limit: int = UPCOMING_LIMIT) -> list[Event]:
    """Events dated today or later, earliest first, at most ``limit`` of them."""
    today = today or date.today()
    upcoming = sorted((e for e in events if e.date >= today), key=_sort_key)
    return upcoming[:limit]


def month_grid(year: int, month: int) -> list[list[int]]:
    """Sunday-first weeks of the month; 0 marks padding days of adjacent months."""
    return _sunday_first.monthdayscalendar(year, month)


def shift_month(year: int, month: int, step: int) -> tuple[int, int]:
    index = year * 12 + (month - 1) + step
    return index // 12, index % 12 + 1


def month_title(year: int, month: int) -> str:
    return f"{calendar.month_name[month]} {year}"
