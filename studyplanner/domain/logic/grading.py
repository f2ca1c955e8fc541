from __future__ import annotations

from typing import Iterable

STATUS_BANDS: list[tuple[float, str]] = [
    (90, "Excellent"),
    (80, "Good"),
    (70, "Average"),
    (0, "Needs Improvement"),
]

RECENT_GRADES = 5


def clamp_0_100(value: float) -> float:
    return max(0.0, min(100.0, value))


def parse_grade(raw: str | float | None) -> float:
    """Turn form input into a grade; raises ValueError unless it is a number in 0..100."""
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        raise ValueError("Please enter a valid grade (0-100)")
    try:
        grade = float(raw)
    except (TypeError, ValueError) as exc:
        raise ValueError("Please enter a valid grade (0-100)") from exc
    if grade != grade or grade < 0 or grade > 100:
        raise ValueError("Please enter a valid grade (0-100)")
    return int(grade) if grade.is_integer() else grade


def average(grades: Iterable[float]) -> float | None:
    values = list(grades)
    if not values:
        return None
    return sum(values) / len(values)


def grade_status(avg: float | None) -> str | None:
    if avg is None:
        return None
    score = clamp_0_100(avg)
    for low, label in STATUS_BANDS:
        if score >= low:
            return label
    return STATUS_BANDS[-1][1]


def recent_grades(grades: list[float], limit: int = RECENT_GRADES) -> list[float]:
    return list(grades[-limit:]) if limit > 0 else []


def format_average(avg: float | None) -> str:
    return "No grades yet" if avg is None else f"{avg:.1f}"
