from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Iterable

from studyplanner.domain.models.entities import Task

TASK_CATEGORIES: list[str] = ["general", "mathematics", "science", "history", "english"]


class TaskFilter(str, Enum):
    ALL = "all"
    PENDING = "pending"
    COMPLETED = "completed"
    OVERDUE = "overdue"


FILTER_LABELS: dict[TaskFilter, str] = {
    TaskFilter.ALL: "All Tasks",
    TaskFilter.PENDING: "Pending",
    TaskFilter.COMPLETED: "Completed",
    TaskFilter.OVERDUE: "Overdue",
}


@dataclass(frozen=True)
class TaskCounts:
    total: int
    completed: int
    pending: int
    overdue: int


def is_overdue(task: Task, today: date | None = None) -> bool:
    """An open task is overdue from the start of its due day."""
    if task.completed or task.due_date is None:
        return False
    return task.due_date <= (today or date.today())


def matches_filter(task: Task, task_filter: TaskFilter | str, today: date | None = None) -> bool:
    task_filter = TaskFilter(task_filter)
    if task_filter is TaskFilter.COMPLETED:
        return task.completed
    if task_filter is TaskFilter.PENDING:
        return not task.completed
    if task_filter is TaskFilter.OVERDUE:
        return is_overdue(task, today)
    return True


def filter_tasks(tasks: Iterable[Task], task_filter: TaskFilter | str, today: date | None = None) -> list[Task]:
    today = today or date.today()
    return [t for t in tasks if matches_filter(t, task_filter, today)]


def count_tasks(tasks: Iterable[Task], today: date | None = None) -> TaskCounts:
    today = today or date.today()
    items = list(tasks)
    completed = sum(1 for t in items if t.completed)
    overdue = sum(1 for t in items if is_overdue(t, today))
    return TaskCounts(
        total=len(items),
        completed=completed,
        pending=len(items) - completed,
        overdue=overdue,
    )


def empty_message(task_filter: TaskFilter | str) -> str:
    task_filter = TaskFilter(task_filter)
    if task_filter is TaskFilter.ALL:
        return "Add your first task to get started!"
    return f"No {task_filter.value} tasks at the moment."
