"""First-run datasets written to an empty storage slot."""

from __future__ import annotations

import datetime as dt

from studyplanner.domain.models.entities import (
    Event,
    EventType,
    Priority,
    StudySession,
    Subject,
    Task,
    TimerSettings,
    utc_now,
)


def sample_subjects() -> list[Subject]:
    return [
        Subject(id="1", name="Mathematics", grades=[85, 92, 78, 88], color="blue"),
        Subject(id="2", name="Science", grades=[90, 87, 95], color="green"),
        Subject(id="3", name="History", grades=[82, 79, 85, 91], color="purple"),
    ]


def sample_tasks() -> list[Task]:
    created = utc_now()
    return [
        Task(
            id="1",
            title="Complete Math Assignment",
            description="Finish exercises 1-20 from Chapter 5",
            priority=Priority.HIGH,
            category="mathematics",
            due_date=dt.date(2024, 12, 15),
            created_at=created,
        ),
        Task(
            id="2",
            title="Study for Science Test",
            description="Review chapters 3-5 on chemistry",
            priority=Priority.MEDIUM,
            category="science",
            due_date=dt.date(2024, 12, 20),
            created_at=created,
        ),
        Task(
            id="3",
            title="Read History Chapter",
            description="Chapter 8: World War II",
            completed=True,
            priority=Priority.LOW,
            category="history",
            due_date=dt.date(2024, 12, 10),
            created_at=created,
        ),
    ]


def sample_events() -> list[Event]:
    return [
        Event(
            id="1",
            title="Math Exam",
            date=dt.date(2024, 12, 15),
            time="10:00",
            type=EventType.EXAM,
            description="Final exam for Algebra II",
        ),
        Event(
            id="2",
            title="Science Project Due",
            date=dt.date(2024, 12, 18),
            time="23:59",
            type=EventType.ASSIGNMENT,
            description="Submit chemistry lab report",
        ),
        Event(
            id="3",
            title="History Presentation",
            date=dt.date(2024, 12, 20),
            time="14:00",
            type=EventType.PROJECT,
            description="World War II group presentation",
        ),
    ]


def sample_sessions() -> list[StudySession]:
    return []


def default_timer_settings() -> TimerSettings:
    return TimerSettings()
