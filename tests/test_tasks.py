import unittest
from datetime import date

from studyplanner.domain.logic.tasks import TaskFilter, count_tasks, empty_message, filter_tasks, is_overdue
from studyplanner.domain.models.entities import Task

TODAY = date(2026, 3, 10)


def make_task(task_id, completed=False, due=None):
    return Task(id=task_id, title=f"Task {task_id}", completed=completed, due_date=due)


class TaskFilterTests(unittest.TestCase):
    def setUp(self):
        self.overdue = make_task("1", due=date(2026, 3, 9))
        self.due_today = make_task("2", due=TODAY)
        self.done_late = make_task("3", completed=True, due=date(2026, 1, 1))
        self.no_date = make_task("4")
        self.tasks = [self.overdue, self.due_today, self.done_late, self.no_date]

    def test_past_due_open_task_is_overdue(self):
        self.assertTrue(is_overdue(self.overdue, TODAY))
        self.assertTrue(is_overdue(self.due_today, TODAY))
        self.assertFalse(is_overdue(self.done_late, TODAY))
        self.assertFalse(is_overdue(self.no_date, TODAY))

    def test_overdue_task_never_in_completed(self):
        self.assertEqual(filter_tasks(self.tasks, TaskFilter.OVERDUE, TODAY), [self.overdue, self.due_today])
        self.assertNotIn(self.overdue, filter_tasks(self.tasks, TaskFilter.COMPLETED, TODAY))
        self.assertIn(self.overdue, filter_tasks(self.tasks, TaskFilter.PENDING, TODAY))
        self.assertIn(self.overdue, filter_tasks(self.tasks, "all", TODAY))

    def test_filters_partition_by_completion(self):
        pending = filter_tasks(self.tasks, "pending", TODAY)
        completed = filter_tasks(self.tasks, "completed", TODAY)
        self.assertEqual(len(pending) + len(completed), len(self.tasks))
        self.assertEqual(completed, [self.done_late])

    def test_counts(self):
        counts = count_tasks(self.tasks, TODAY)
        self.assertEqual((counts.total, counts.completed, counts.pending, counts.overdue), (4, 1, 3, 2))

    def test_unknown_filter_is_rejected(self):
        with self.assertRaises(ValueError):
            filter_tasks(self.tasks, "someday", TODAY)

    def test_task_due_today_is_overdue_until_done(self):
        self.assertEqual(filter_tasks([self.due_today], "overdue", TODAY), [self.due_today])
        done = self.due_today.model_copy(update={"completed": True})
        self.assertEqual(filter_tasks([done], "overdue", TODAY), [])
        tomorrow = make_task("5", due=date(2026, 3, 11))
        self.assertFalse(is_overdue(tomorrow, TODAY))

    def test_empty_messages(self):
        self.assertEqual(empty_message("all"), "Add your first task to get started!")
        self.assertEqual(empty_message(TaskFilter.OVERDUE), "No overdue tasks at the moment.")


if __name__ == "__main__":
    unittest.main()
