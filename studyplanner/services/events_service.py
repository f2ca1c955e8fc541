from __future__ import annotations

import logging
from datetime import date

from studyplanner.config.settings import settings
from studyplanner.domain.logic.events import group_by_day, upcoming_events
from studyplanner.domain.models.entities import Event, EventType, new_id
from studyplanner.domain.models.samples import sample_events
from studyplanner.services.persistence import StorageSlot
from studyplanner.services.storage import LocalStorage
from studyplanner.services.validation import InputError, parse_date, parse_time

logger = logging.getLogger(__name__)


class EventsService:
    def __init__(self, storage: LocalStorage, key: str | None = None) -> None:
        self.slot: StorageSlot[list[Event]] = StorageSlot(
            storage, key or settings.storage_key("events"), list[Event], sample_events
        )
        self.events: list[Event] = self.slot.load()

    def _commit(self, events: list[Event]) -> None:
        self.events = events
        self.slot.save(events)

    def add_event(
        self,
        title: str | None,
        event_date: str | date | None,
        time: str | None = "",
        event_type: EventType | str | None = EventType.OTHER,
        description: str | None = "",
    ) -> Event:
        clean_title = (title or "").strip()
        try:
            if not clean_title or not event_date:
                raise InputError("Please enter a title and date")
            day = parse_date(event_date, required=True)
            clean_time = parse_time(time)
            try:
                kind = EventType(event_type or EventType.OTHER)
            except ValueError as exc:
                raise InputError("Unknown event type.") from exc
        except InputError as exc:
            logger.warning("Rejected event %r on %r: %s", title, event_date, exc)
            raise

        event = Event(
            id=new_id(e.id for e in self.events),
            title=clean_title,
            date=day,
            time=clean_time,
            type=kind,
            description=(description or "").strip(),
        )
        self._commit([*self.events, event])
        logger.info("Event added id=%s date=%s type=%s", event.id, event.date, event.type.value)
        return event

    def delete_event(self, event_id: str) -> None:
        self._commit([e for e in self.events if e.id != event_id])
        logger.info("Event deleted id=%s", event_id)

    def by_day(self) -> dict[date, list[Event]]:
        return group_by_day(self.events)

    def upcoming(self, today: date | None = None) -> list[Event]:
        return upcoming_events(self.events, today)
