from __future__ import annotations

import logging
from datetime import date

from studyplanner.config.settings import settings
from studyplanner.domain.logic.tasks import TaskCounts, TaskFilter, count_tasks, filter_tasks
from studyplanner.domain.models.entities import Priority, Task, new_id, utc_now
from studyplanner.domain.models.samples import sample_tasks
from studyplanner.services.persistence import StorageSlot
from studyplanner.services.storage import LocalStorage
from studyplanner.services.validation import InputError, parse_date, require_text

logger = logging.getLogger(__name__)


class TasksService:
    def __init__(self, storage: LocalStorage, key: str | None = None) -> None:
        self.slot: StorageSlot[list[Task]] = StorageSlot(
            storage, key or settings.storage_key("tasks"), list[Task], sample_tasks
        )
        self.tasks: list[Task] = self.slot.load()

    def _commit(self, tasks: list[Task]) -> None:
        self.tasks = tasks
        self.slot.save(tasks)

    def add_task(
        self,
        title: str | None,
        description: str | None = "",
        priority: Priority | str | None = Priority.MEDIUM,
        category: str | None = "general",
        due_date: str | date | None = None,
    ) -> Task:
        try:
            clean_title = require_text(title, "Please enter a task title")
            due = parse_date(due_date)
            try:
                level = Priority(priority or Priority.MEDIUM)
            except ValueError as exc:
                raise InputError("Priority must be low, medium or high.") from exc
        except InputError as exc:
            logger.warning("Rejected task %r: %s", title, exc)
            raise

        task = Task(
            id=new_id(t.id for t in self.tasks),
            title=clean_title,
            description=(description or "").strip(),
            completed=False,
            priority=level,
            category=(category or "").strip() or "general",
            due_date=due,
            created_at=utc_now(),
        )
        self._commit([task, *self.tasks])
        logger.info("Task added id=%s priority=%s due=%s", task.id, task.priority.value, task.due_date)
        return task

    def toggle_task(self, task_id: str) -> Task | None:
        toggled: Task | None = None
        tasks: list[Task] = []
        for task in self.tasks:
            if task.id == task_id:
                task = task.model_copy(update={"completed": not task.completed})
                toggled = task
            tasks.append(task)
        self._commit(tasks)
        if toggled is not None:
            logger.info("Task toggled id=%s completed=%s", task_id, toggled.completed)
        return toggled

    def delete_task(self, task_id: str) -> None:
        self._commit([t for t in self.tasks if t.id != task_id])
        logger.info("Task deleted id=%s", task_id)

    def filtered(self, task_filter: TaskFilter | str = TaskFilter.ALL, today: date | None = None) -> list[Task]:
        return filter_tasks(self.tasks, task_filter, today)

    def counts(self, today: date | None = None) -> TaskCounts:
        return count_tasks(self.tasks, today)
