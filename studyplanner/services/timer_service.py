from __future__ import annotations

import datetime as dt
import logging
import threading
from typing import Any

from pydantic import ValidationError

from studyplanner.config.settings import settings
from studyplanner.domain.logic.timer import PomodoroTimer, pomodoros_on, study_minutes_on
from studyplanner.domain.models.entities import StudySession, TimerSettings
from studyplanner.domain.models.samples import default_timer_settings, sample_sessions
from studyplanner.services.persistence import StorageSlot
from studyplanner.services.storage import LocalStorage
from studyplanner.services.validation import InputError

logger = logging.getLogger(__name__)


class TimerService:
    """Pomodoro timer whose settings and session log are mirrored to storage."""

    def __init__(
        self,
        storage: LocalStorage,
        sessions_key: str | None = None,
        settings_key: str | None = None,
    ) -> None:
        self.sessions_slot: StorageSlot[list[StudySession]] = StorageSlot(
            storage, sessions_key or settings.storage_key("sessions"), list[StudySession], sample_sessions
        )
        self.settings_slot: StorageSlot[TimerSettings] = StorageSlot(
            storage, settings_key or settings.storage_key("timer-settings"), TimerSettings, default_timer_settings
        )
        self.timer = PomodoroTimer(self.settings_slot.load(), self.sessions_slot.load())
        # The ticker thread and UI handlers both drive the timer.
        self._lock = threading.Lock()

    @property
    def settings(self) -> TimerSettings:
        return self.timer.settings

    @property
    def sessions(self) -> list[StudySession]:
        return self.timer.sessions

    def toggle(self) -> bool:
        with self._lock:
            return self.timer.toggle()

    def reset(self) -> None:
        with self._lock:
            self.timer.reset()

    def tick(self, seconds: int = 1, now: dt.datetime | None = None) -> StudySession | None:
        with self._lock:
            session = self.timer.tick(seconds, now)
            if session is not None:
                self.sessions_slot.save(self.timer.sessions)
        if session is not None:
            logger.info(
                "Session complete type=%s duration=%sm next_phase=%s",
                session.type.value,
                session.duration,
                self.timer.phase.value,
            )
        return session

    def update_settings(self, **changes: Any) -> TimerSettings:
        data = {**self.timer.settings.model_dump(), **changes}
        try:
            new_settings = TimerSettings.model_validate(data)
        except ValidationError as exc:
            logger.warning("Rejected timer settings %s", changes)
            raise InputError("Timer durations must be positive whole numbers.") from exc
        with self._lock:
            self.timer.update_settings(new_settings)
        self.settings_slot.save(new_settings)
        return new_settings

    def pomodoros_today(self, today: dt.date | None = None) -> int:
        return pomodoros_on(self.timer.sessions, today or dt.date.today())

    def study_minutes_today(self, today: dt.date | None = None) -> int:
        return study_minutes_on(self.timer.sessions, today or dt.date.today())
