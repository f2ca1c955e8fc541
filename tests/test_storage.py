import json
import tempfile
import unittest
from pathlib import Path

from pydantic import ValidationError

from studyplanner.domain.models.entities import Subject
from studyplanner.services.persistence import StorageSlot
from studyplanner.services.storage import LocalStorage


class LocalStorageTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.path = Path(self._tmp.name) / "nested" / "local_storage.json"
        self.storage = LocalStorage(self.path)

    def tearDown(self):
        self._tmp.cleanup()

    def test_missing_key_is_none(self):
        self.assertIsNone(self.storage.get_item("studyplanner-tasks"))
        self.assertEqual(len(self.storage), 0)

    def test_set_get_remove(self):
        self.storage.set_item("a", "[1, 2]")
        self.assertEqual(self.storage.get_item("a"), "[1, 2]")
        self.storage.remove_item("a")
        self.assertIsNone(self.storage.get_item("a"))

    def test_instances_on_same_file_keep_each_others_keys(self):
        other = LocalStorage(self.path)
        self.storage.set_item("subjects", "[]")
        other.set_item("tasks", "[]")
        self.assertEqual(sorted(self.storage.keys()), ["subjects", "tasks"])

    def test_document_is_plain_json(self):
        self.storage.set_item("settings", json.dumps({"workDuration": 25}))
        data = json.loads(self.path.read_text(encoding="utf-8"))
        self.assertEqual(data, {"settings": '{"workDuration": 25}'})

    def test_clear(self):
        self.storage.set_item("a", "1")
        self.storage.clear()
        self.assertEqual(self.storage.keys(), [])

    def test_corrupted_file_raises(self):
        self.path.write_text("{not json", encoding="utf-8")
        with self.assertRaises(json.JSONDecodeError):
            self.storage.get_item("a")


class StorageSlotTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.storage = LocalStorage(Path(self._tmp.name) / "local_storage.json")
        self.seed_calls = 0

    def tearDown(self):
        self._tmp.cleanup()

    def _seed(self):
        self.seed_calls += 1
        return [Subject(id="1", name="Art", grades=[70])]

    def _slot(self):
        return StorageSlot(self.storage, "studyplanner-subjects", list[Subject], self._seed)

    def test_absent_slot_is_seeded_and_written(self):
        subjects = self._slot().load()
        self.assertEqual([s.name for s in subjects], ["Art"])
        self.assertEqual(
            json.loads(self.storage.get_item("studyplanner-subjects")),
            [{"id": "1", "name": "Art", "grades": [70], "color": "blue"}],
        )

    def test_present_slot_is_not_reseeded(self):
        self._slot().load()
        self._slot().load()
        self.assertEqual(self.seed_calls, 1)

    def test_saved_empty_collection_stays_empty(self):
        slot = self._slot()
        slot.load()
        slot.save([])
        self.assertEqual(self._slot().load(), [])

    def test_corrupted_slot_raises(self):
        self.storage.set_item("studyplanner-subjects", '[{"id": "1"}]')
        with self.assertRaises(ValidationError):
            self._slot().load()
        self.storage.set_item("studyplanner-subjects", "not json")
        with self.assertRaises(ValidationError):
            self._slot().load()


if __name__ == "__main__":
    unittest.main()
