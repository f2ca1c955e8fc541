from __future__ import annotations

import datetime as dt
from enum import Enum
from typing import Iterable

from studyplanner.domain.models.entities import SessionType, StudySession, TimerSettings, new_id, utc_now

MAX_SESSIONS = 50
RECENT_SESSIONS = 10

WORK_DURATION_CHOICES = [15, 25, 30, 45, 60]
SHORT_BREAK_CHOICES = [5, 10, 15]
LONG_BREAK_CHOICES = [15, 20, 30]


class Phase(str, Enum):
    WORK = "work"
    BREAK = "break"


class TimerState(str, Enum):
    WORK_RUNNING = "work-running"
    WORK_PAUSED = "work-paused"
    BREAK_RUNNING = "break-running"
    BREAK_PAUSED = "break-paused"


def format_time(seconds: int) -> str:
    mins, secs = divmod(max(0, int(seconds)), 60)
    return f"{mins:02d}:{secs:02d}"


def format_study_time(minutes: int) -> str:
    hours, mins = divmod(max(0, int(minutes)), 60)
    return f"{hours}h {mins}m"


def append_session(sessions: list[StudySession], session: StudySession, limit: int = MAX_SESSIONS) -> list[StudySession]:
    """Newest first; the oldest entries fall off once the log is full."""
    return [session, *sessions[: max(0, limit - 1)]]


def sessions_on(sessions: Iterable[StudySession], day: dt.date) -> list[StudySession]:
    return [s for s in sessions if s.completed_at.astimezone().date() == day]


def pomodoros_on(sessions: Iterable[StudySession], day: dt.date) -> int:
    return sum(1 for s in sessions_on(sessions, day) if s.type is SessionType.WORK)


def study_minutes_on(sessions: Iterable[StudySession], day: dt.date) -> int:
    return sum(s.duration for s in sessions_on(sessions, day) if s.type is SessionType.WORK)


class PomodoroTimer:
    """
    Countdown cycling between a work phase and a break phase.

    The timer never advances on its own: a caller drives it through ``tick``.
    When the countdown reaches zero a StudySession is logged, the phase flips,
    the next duration is loaded from the settings and the timer stays paused
    until it is started again.
    """

    def __init__(self, settings: TimerSettings, sessions: list[StudySession] | None = None) -> None:
        self.settings = settings
        self.sessions: list[StudySession] = list(sessions or [])
        self.phase = Phase.WORK
        self.long_break = False
        self.running = False
        self.phase_minutes = settings.work_duration
        self.time_left = self.phase_minutes * 60

    @property
    def work_since_long_break(self) -> int:
        """Work sessions logged after the most recent long break (newest first)."""
        count = 0
        for session in self.sessions:
            if session.long_break:
                break
            if session.type is SessionType.WORK:
                count += 1
        return count

    @property
    def state(self) -> TimerState:
        if self.phase is Phase.WORK:
            return TimerState.WORK_RUNNING if self.running else TimerState.WORK_PAUSED
        return TimerState.BREAK_RUNNING if self.running else TimerState.BREAK_PAUSED

    @property
    def is_break(self) -> bool:
        return self.phase is Phase.BREAK

    @property
    def total_seconds(self) -> int:
        return self.phase_minutes * 60

    @property
    def progress(self) -> float:
        total = self.total_seconds
        if total <= 0:
            return 0.0
        return (total - self.time_left) / total * 100

    @property
    def display(self) -> str:
        return format_time(self.time_left)

    def start(self) -> None:
        self.running = True

    def pause(self) -> None:
        self.running = False

    def toggle(self) -> bool:
        if self.running:
            self.pause()
        else:
            self.start()
        return self.running

    def reset(self) -> None:
        self.running = False
        self._load_phase(Phase.WORK)

    def tick(self, seconds: int = 1, now: dt.datetime | None = None) -> StudySession | None:
        """Advance a running countdown; returns the logged session if the phase just ended."""
        if not self.running or seconds <= 0:
            return None
        self.time_left = max(0, self.time_left - int(seconds))
        if self.time_left > 0:
            return None
        return self._complete(now or utc_now())

    def update_settings(self, settings: TimerSettings) -> None:
        at_full_duration = not self.running and self.time_left == self.total_seconds
        self.settings = settings
        if at_full_duration:
            self._load_phase(self.phase, long_break=self.long_break)

    def recent_sessions(self, limit: int = RECENT_SESSIONS) -> list[StudySession]:
        return self.sessions[:limit]

    def _complete(self, now: dt.datetime) -> StudySession:
        self.running = False
        session = StudySession(
            id=new_id(s.id for s in self.sessions),
            duration=self.phase_minutes,
            type=SessionType.WORK if self.phase is Phase.WORK else SessionType.BREAK,
            completed_at=now,
            long_break=self.is_break and self.long_break,
        )
        self.sessions = append_session(self.sessions, session)

        if self.phase is Phase.WORK:
            long_break = self.work_since_long_break >= self.settings.sessions_until_long_break
            self._load_phase(Phase.BREAK, long_break=long_break)
        else:
            self._load_phase(Phase.WORK)
        return session

    def _load_phase(self, phase: Phase, long_break: bool = False) -> None:
        self.phase = phase
        if phase is Phase.WORK:
            self.long_break = False
            self.phase_minutes = self.settings.work_duration
        else:
            self.long_break = long_break
            self.phase_minutes = self.settings.long_break if long_break else self.settings.short_break
        self.time_left = self.phase_minutes * 60
