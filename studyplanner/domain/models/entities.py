from __future__ import annotations

import datetime as dt
import re
import time
from enum import Enum
from typing import Annotated, Any, Iterable, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel

TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")

SUBJECT_COLORS: list[str] = ["blue", "green", "purple", "red", "yellow", "indigo", "pink", "teal"]

Grade = Union[Annotated[int, Field(ge=0, le=100)], Annotated[float, Field(ge=0, le=100)]]


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class EventType(str, Enum):
    EXAM = "exam"
    ASSIGNMENT = "assignment"
    PROJECT = "project"
    CLASS = "class"
    OTHER = "other"


class SessionType(str, Enum):
    WORK = "work"
    BREAK = "break"


def new_id(existing: Iterable[str] = ()) -> str:
    """Epoch-milliseconds id, bumped until it is unused in ``existing``."""
    taken = set(existing)
    candidate = int(time.time() * 1000)
    while str(candidate) in taken:
        candidate += 1
    return str(candidate)


def utc_now() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


class StoredModel(BaseModel):
    """Base for everything kept in local storage; JSON keys are camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class Subject(StoredModel):
    id: str
    name: str
    grades: list[Grade] = Field(default_factory=list)
    color: str = SUBJECT_COLORS[0]


class Task(StoredModel):
    id: str
    title: str
    description: str = ""
    completed: bool = False
    priority: Priority = Priority.MEDIUM
    category: str = "general"
    due_date: Optional[dt.date] = None
    created_at: dt.datetime = Field(default_factory=utc_now)

    @field_validator("due_date", mode="before")
    @classmethod
    def _blank_due_date(cls, value: Any) -> Any:
        return None if value in ("", None) else value

    @field_serializer("due_date")
    def _dump_due_date(self, value: Optional[dt.date]) -> str:
        return value.isoformat() if value else ""


class Event(StoredModel):
    id: str
    title: str
    date: dt.date
    time: str = ""
    type: EventType = EventType.OTHER
    description: str = ""

    @field_validator("time")
    @classmethod
    def _check_time(cls, value: str) -> str:
        if value and not TIME_PATTERN.match(value):
            raise ValueError("time must be HH:MM")
        return value


class StudySession(StoredModel):
    id: str
    duration: int
    type: SessionType
    completed_at: dt.datetime = Field(default_factory=utc_now)
    long_break: bool = False


class TimerSettings(StoredModel):
    model_config = ConfigDict(frozen=True)

    work_duration: int = Field(default=25, ge=1)
    short_break: int = Field(default=5, ge=1)
    long_break: int = Field(default=15, ge=1)
    sessions_until_long_break: int = Field(default=4, ge=1)
