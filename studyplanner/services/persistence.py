from __future__ import annotations

import logging
from typing import Callable, Generic, TypeVar

from pydantic import TypeAdapter

from studyplanner.services.storage import LocalStorage

logger = logging.getLogger(__name__)

T = TypeVar("T")


class StorageSlot(Generic[T]):
    """
    One page's state under one storage key.

    ``load`` returns the stored value, or writes and returns the seed when the
    key is absent. ``save`` always writes the whole value. Stored text that no
    longer parses raises pydantic.ValidationError.
    """

    def __init__(self, storage: LocalStorage, key: str, value_type: type[T] | object, seed: Callable[[], T]) -> None:
        self.storage = storage
        self.key = key
        self.adapter: TypeAdapter[T] = TypeAdapter(value_type)
        self.seed = seed

    def load(self) -> T:
        raw = self.storage.get_item(self.key)
        if raw is None:
            value = self.seed()
            self.save(value)
            logger.info("Seeded storage slot %s", self.key)
            return value
        return self.adapter.validate_json(raw)

    def save(self, value: T) -> None:
        self.storage.set_item(self.key, self.adapter.dump_json(value, by_alias=True).decode("utf-8"))
