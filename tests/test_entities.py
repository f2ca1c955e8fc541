import datetime as dt
import unittest

from pydantic import ValidationError

from studyplanner.domain.models.entities import Event, Priority, Subject, Task, TimerSettings, new_id


class EntityShapeTests(unittest.TestCase):
    def test_task_reads_stored_camel_case(self):
        task = Task.model_validate(
            {
                "id": "1",
                "title": "Complete Math Assignment",
                "description": "",
                "completed": False,
                "priority": "high",
                "category": "mathematics",
                "dueDate": "2024-12-15",
                "createdAt": "2024-12-01T10:00:00.000Z",
            }
        )
        self.assertEqual(task.due_date, dt.date(2024, 12, 15))
        self.assertEqual(task.priority, Priority.HIGH)
        self.assertEqual(task.created_at.utcoffset(), dt.timedelta(0))

    def test_blank_due_date_round_trips_as_blank(self):
        task = Task.model_validate({"id": "1", "title": "x", "dueDate": ""})
        self.assertIsNone(task.due_date)
        self.assertEqual(task.to_json()["dueDate"], "")

    def test_grades_outside_range_are_invalid(self):
        with self.assertRaises(ValidationError):
            Subject(id="1", name="Art", grades=[101])
        self.assertEqual(Subject(id="1", name="Art", grades=[99.5, 80]).grades, [99.5, 80])

    def test_event_time_format(self):
        with self.assertRaises(ValidationError):
            Event(id="1", title="x", date=dt.date(2026, 1, 1), time="9am")
        self.assertEqual(Event(id="1", title="x", date=dt.date(2026, 1, 1)).time, "")

    def test_timer_settings_must_be_positive(self):
        with self.assertRaises(ValidationError):
            TimerSettings(sessions_until_long_break=0)
        self.assertEqual(TimerSettings().to_json()["sessionsUntilLongBreak"], 4)


class NewIdTests(unittest.TestCase):
    def test_ids_are_numeric_and_unique(self):
        first = new_id()
        self.assertTrue(first.isdigit())
        second = new_id([first])
        self.assertNotEqual(first, second)
        ids = []
        for _ in range(20):
            ids.append(new_id(ids))
        self.assertEqual(len(set(ids)), 20)


if __name__ == "__main__":
    unittest.main()
