import datetime as dt
import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from studyplanner.domain.logic.tasks import TaskFilter
from studyplanner.domain.models.entities import EventType, Priority, SessionType
from studyplanner.services.events_service import EventsService
from studyplanner.services.storage import LocalStorage
from studyplanner.services.subjects_service import SubjectsService
from studyplanner.services.tasks_service import TasksService
from studyplanner.services.timer_service import TimerService
from studyplanner.services.validation import InputError


class ServiceTestCase(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.storage = LocalStorage(Path(self._tmp.name) / "local_storage.json")

    def tearDown(self):
        self._tmp.cleanup()

    def stored(self, key):
        return json.loads(self.storage.get_item(key))


class SubjectsServiceTests(ServiceTestCase):
    def test_first_activation_seeds_samples(self):
        service = SubjectsService(self.storage)
        self.assertEqual([s.name for s in service.subjects], ["Mathematics", "Science", "History"])
        self.assertEqual(len(self.stored("studyplanner-subjects")), 3)

    def test_add_grade_to_empty_subject_defines_average(self):
        service = SubjectsService(self.storage)
        subject = service.add_subject("  Biology ")
        self.assertEqual(subject.name, "Biology")
        self.assertEqual(subject.color, "red")
        self.assertIsNone(service.average(subject))
        self.assertIsNone(service.status(subject))

        updated = service.add_grade(subject.id, "91")
        self.assertEqual(updated.grades, [91])
        self.assertEqual(service.average(updated), 91)
        self.assertEqual(service.status(updated), "Excellent")

        updated = service.add_grade(subject.id, 70)
        self.assertEqual(len(updated.grades), 2)
        self.assertAlmostEqual(service.average(updated), 80.5)

    def test_changes_survive_reload(self):
        service = SubjectsService(self.storage)
        math = service.subjects[0]
        service.add_grade(math.id, "100")
        service.remove_subject(service.subjects[1].id)

        reloaded = SubjectsService(self.storage)
        self.assertEqual([s.name for s in reloaded.subjects], ["Mathematics", "History"])
        self.assertEqual(reloaded.subjects[0].grades, [85, 92, 78, 88, 100])

    def test_removing_every_subject_is_persisted(self):
        service = SubjectsService(self.storage)
        for subject in list(service.subjects):
            service.remove_subject(subject.id)
        self.assertEqual(SubjectsService(self.storage).subjects, [])

    def test_invalid_input_rejected_without_writing(self):
        service = SubjectsService(self.storage)
        before = self.storage.get_item("studyplanner-subjects")
        with self.assertLogs("studyplanner.services.subjects_service", level="WARNING"):
            with self.assertRaises(InputError):
                service.add_subject("   ")
        with self.assertRaises(InputError):
            service.add_grade(service.subjects[0].id, "101")
        self.assertEqual(self.storage.get_item("studyplanner-subjects"), before)

    def test_unknown_subject_grade_is_ignored(self):
        service = SubjectsService(self.storage)
        self.assertIsNone(service.add_grade("missing", "80"))


class TasksServiceTests(ServiceTestCase):
    def test_new_task_is_prepended_and_stored_camel_case(self):
        service = TasksService(self.storage)
        task = service.add_task(
            "Essay", description="Draft intro", priority="high", category="english", due_date="2026-11-02"
        )
        self.assertEqual(service.tasks[0].id, task.id)
        self.assertEqual(task.priority, Priority.HIGH)
        raw = self.stored("studyplanner-tasks")[0]
        self.assertEqual(raw["dueDate"], "2026-11-02")
        self.assertIn("createdAt", raw)
        self.assertFalse(raw["completed"])

    def test_task_without_due_date_stores_blank(self):
        service = TasksService(self.storage)
        service.add_task("Read", due_date="")
        self.assertEqual(self.stored("studyplanner-tasks")[0]["dueDate"], "")
        self.assertIsNone(TasksService(self.storage).tasks[0].due_date)

    def test_validation(self):
        service = TasksService(self.storage)
        with self.assertRaises(InputError):
            service.add_task("")
        with self.assertRaises(InputError):
            service.add_task("Essay", due_date="02/11/2026")
        with self.assertRaises(InputError):
            service.add_task("Essay", priority="urgent")

    def test_overdue_filter_and_toggle(self):
        service = TasksService(self.storage)
        today = dt.date(2026, 10, 19)
        late = service.add_task("Late lab", due_date="2026-10-01")
        self.assertIn(late.id, [t.id for t in service.filtered(TaskFilter.OVERDUE, today)])
        self.assertNotIn(late.id, [t.id for t in service.filtered(TaskFilter.COMPLETED, today)])

        service.toggle_task(late.id)
        self.assertNotIn(late.id, [t.id for t in service.filtered(TaskFilter.OVERDUE, today)])
        self.assertTrue(TasksService(self.storage).tasks[0].completed)

    def test_sample_counts(self):
        counts = TasksService(self.storage).counts(dt.date(2026, 10, 19))
        self.assertEqual((counts.total, counts.completed, counts.pending, counts.overdue), (3, 1, 2, 2))

    def test_rejections_and_toggles_are_logged(self):
        service = TasksService(self.storage)
        with self.assertLogs("studyplanner.services.tasks_service", level="WARNING") as logs:
            with self.assertRaises(InputError):
                service.add_task("Essay", priority="urgent")
        self.assertIn("Priority must be low, medium or high.", logs.output[0])
        with self.assertLogs("studyplanner.services.tasks_service", level="INFO") as logs:
            service.toggle_task("1")
        self.assertIn("Task toggled id=1 completed=True", logs.output[0])

    def test_delete(self):
        service = TasksService(self.storage)
        service.delete_task("1")
        self.assertEqual([t.id for t in TasksService(self.storage).tasks], ["2", "3"])


class EventsServiceTests(ServiceTestCase):
    def test_add_and_upcoming(self):
        service = EventsService(self.storage)
        today = dt.date(2026, 10, 19)
        event = service.add_event("Chem quiz", "2026-10-21", time="09:30", event_type="exam")
        self.assertEqual(service.events[-1].id, event.id)
        self.assertEqual(event.type, EventType.EXAM)
        self.assertEqual([e.id for e in service.upcoming(today)], [event.id])
        self.assertEqual(service.by_day()[dt.date(2026, 10, 21)], [event])
        raw = self.stored("studyplanner-events")[-1]
        self.assertEqual(raw, {
            "id": event.id,
            "title": "Chem quiz",
            "date": "2026-10-21",
            "time": "09:30",
            "type": "exam",
            "description": "",
        })

    def test_validation(self):
        service = EventsService(self.storage)
        with self.assertRaises(InputError):
            service.add_event("", "2026-10-21")
        with self.assertRaises(InputError):
            service.add_event("Quiz", "")
        with self.assertRaises(InputError):
            service.add_event("Quiz", "2026-13-01")
        with self.assertRaises(InputError):
            service.add_event("Quiz", "2026-10-21", time="25:00")

    def test_rejected_event_is_logged(self):
        service = EventsService(self.storage)
        with self.assertLogs("studyplanner.services.events_service", level="WARNING") as logs:
            with self.assertRaises(InputError):
                service.add_event("Quiz", "2026-10-21", time="7pm")
        self.assertIn("Invalid time format", logs.output[0])

    def test_delete(self):
        service = EventsService(self.storage)
        service.delete_event("2")
        self.assertEqual([e.id for e in EventsService(self.storage).events], ["1", "3"])


class TimerServiceTests(ServiceTestCase):
    def test_defaults_written_on_first_activation(self):
        service = TimerService(self.storage)
        self.assertEqual(
            self.stored("studyplanner-timer-settings"),
            {"workDuration": 25, "shortBreak": 5, "longBreak": 15, "sessionsUntilLongBreak": 4},
        )
        self.assertEqual(self.stored("studyplanner-sessions"), [])
        self.assertEqual(service.timer.time_left, 25 * 60)

    def test_completed_session_is_persisted(self):
        service = TimerService(self.storage)
        service.update_settings(work_duration=15)
        service.toggle()
        self.assertIsNone(service.tick(15 * 60 - 1))
        session = service.tick(1)
        self.assertEqual(session.type, SessionType.WORK)
        stored = self.stored("studyplanner-sessions")
        self.assertEqual(len(stored), 1)
        self.assertEqual(stored[0]["duration"], 15)
        self.assertEqual(stored[0]["type"], "work")
        self.assertIn("completedAt", stored[0])
        self.assertFalse(stored[0]["longBreak"])

    def test_reload_restarts_at_full_work_duration(self):
        service = TimerService(self.storage)
        service.toggle()
        service.tick(100)
        reloaded = TimerService(self.storage)
        self.assertFalse(reloaded.timer.running)
        self.assertEqual(reloaded.timer.time_left, 25 * 60)

    def test_invalid_settings_rejected(self):
        service = TimerService(self.storage)
        with self.assertRaises(InputError):
            service.update_settings(short_break=0)
        with self.assertRaises(InputError):
            service.update_settings(long_break="soon")
        self.assertEqual(TimerService(self.storage).settings.short_break, 5)

    def test_timer_changes_are_serialised(self):
        service = TimerService(self.storage)
        seen = []

        def record(name):
            def call(*args, **kwargs):
                seen.append((name, service._lock.locked()))

            return call

        with mock.patch.object(service.timer, "tick", side_effect=record("tick")), \
                mock.patch.object(service.timer, "toggle", side_effect=record("toggle")), \
                mock.patch.object(service.timer, "reset", side_effect=record("reset")), \
                mock.patch.object(service.timer, "update_settings", side_effect=record("update_settings")):
            service.toggle()
            service.tick(1)
            service.update_settings(work_duration=30)
            service.reset()
        self.assertEqual(
            seen,
            [("toggle", True), ("tick", True), ("update_settings", True), ("reset", True)],
        )
        self.assertFalse(service._lock.locked())

    def test_today_stats(self):
        service = TimerService(self.storage)
        service.update_settings(work_duration=30)
        service.toggle()
        now = dt.datetime.now().astimezone()
        service.tick(30 * 60, now=now)
        self.assertEqual(service.pomodoros_today(now.date()), 1)
        self.assertEqual(service.study_minutes_today(now.date()), 30)


if __name__ == "__main__":
    unittest.main()
