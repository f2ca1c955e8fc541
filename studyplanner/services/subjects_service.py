from __future__ import annotations

import logging

from studyplanner.config.settings import settings
from studyplanner.domain.logic.grading import average, grade_status, parse_grade
from studyplanner.domain.models.entities import SUBJECT_COLORS, Subject, new_id
from studyplanner.domain.models.samples import sample_subjects
from studyplanner.services.persistence import StorageSlot
from studyplanner.services.storage import LocalStorage
from studyplanner.services.validation import InputError, require_text

logger = logging.getLogger(__name__)


class SubjectsService:
    def __init__(self, storage: LocalStorage, key: str | None = None) -> None:
        self.slot: StorageSlot[list[Subject]] = StorageSlot(
            storage, key or settings.storage_key("subjects"), list[Subject], sample_subjects
        )
        self.subjects: list[Subject] = self.slot.load()

    def _commit(self, subjects: list[Subject]) -> None:
        self.subjects = subjects
        self.slot.save(subjects)

    def add_subject(self, name: str | None) -> Subject:
        try:
            clean = require_text(name, "Please enter a subject name")
        except InputError as exc:
            logger.warning("Rejected subject name %r: %s", name, exc)
            raise
        subject = Subject(
            id=new_id(s.id for s in self.subjects),
            name=clean,
            grades=[],
            color=SUBJECT_COLORS[len(self.subjects) % len(SUBJECT_COLORS)],
        )
        self._commit([*self.subjects, subject])
        logger.info("Subject added id=%s name=%s", subject.id, subject.name)
        return subject

    def add_grade(self, subject_id: str, raw_grade: str | float | None) -> Subject | None:
        try:
            grade = parse_grade(raw_grade)
        except ValueError as exc:
            logger.warning("Rejected grade %r for subject %s", raw_grade, subject_id)
            raise InputError(str(exc)) from exc

        updated: Subject | None = None
        subjects: list[Subject] = []
        for subject in self.subjects:
            if subject.id == subject_id:
                subject = subject.model_copy(update={"grades": [*subject.grades, grade]})
                updated = subject
            subjects.append(subject)
        self._commit(subjects)
        if updated is not None:
            logger.info("Grade %s added to subject %s", grade, subject_id)
        return updated

    def remove_subject(self, subject_id: str) -> None:
        self._commit([s for s in self.subjects if s.id != subject_id])
        logger.info("Subject removed id=%s", subject_id)

    @staticmethod
    def average(subject: Subject) -> float | None:
        return average(subject.grades)

    @staticmethod
    def status(subject: Subject) -> str | None:
        return grade_status(average(subject.grades))
