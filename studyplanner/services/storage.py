from __future__ import annotations

import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


class LocalStorage:
    """
    Key-value store with browser local-storage semantics, kept in one JSON file.

    Values are strings (callers store JSON text). Every call reads the file, and
    every write replaces it whole, so several pages holding their own
    LocalStorage on the same path never drop each other's keys.
    A corrupted file raises json.JSONDecodeError to the caller.
    """

    def __init__(self, path: str | Path = "data/local_storage.json") -> None:
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        text = self.path.read_text(encoding="utf-8")
        if not text.strip():
            return {}
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError(f"{self.path} does not hold a JSON object")
        return data

    def _write(self, items: dict[str, str]) -> None:
        tmp = self.path.with_name(self.path.name + ".tmp")
        tmp.write_text(json.dumps(items, ensure_ascii=False, indent=2), encoding="utf-8")
        os.replace(tmp, self.path)

    def get_item(self, key: str) -> str | None:
        return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._read()
        items[key] = value
        self._write(items)
        logger.debug("storage write key=%s bytes=%s", key, len(value))

    def remove_item(self, key: str) -> None:
        items = self._read()
        if items.pop(key, None) is not None:
            self._write(items)
            logger.debug("storage remove key=%s", key)

    def keys(self) -> list[str]:
        return list(self._read())

    def clear(self) -> None:
        self._write({})

    def __len__(self) -> int:
        return len(self._read())
