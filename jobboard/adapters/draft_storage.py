"""
Concrete implementations of DraftStoragePort.

InMemoryDraftStorage lives for the process only; JsonFileDraftStorage keeps
every key in one JSON document on disk so drafts survive restarts.
"""

import copy
import json
import logging
import os
import tempfile
from typing import Any

from jobboard.ports.draft_storage_port import DraftStoragePort

logger = logging.getLogger(__name__)


class InMemoryDraftStorage(DraftStoragePort):
    def __init__(self) -> None:
        self._data: dict[str, dict[str, Any]] = {}

    def read(self, key: str) -> dict[str, Any] | None:
        value = self._data.get(key)
        return copy.deepcopy(value) if value is not None else None

    def write(self, key: str, value: dict[str, Any]) -> None:
        self._data[key] = copy.deepcopy(value)

    def clear(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileDraftStorage(DraftStoragePort):
    """Stores drafts in a single JSON file, replaced atomically on every write."""

    def __init__(self, path: str) -> None:
        self._path = path

    def _load(self) -> dict[str, Any]:
        if not os.path.exists(self._path):
            return {}
        try:
            with open(self._path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning(f"Ignoring unreadable draft file {self._path}: {exc}")
            return {}
        return data if isinstance(data, dict) else {}

    def _dump(self, data: dict[str, Any]) -> None:
        directory = os.path.dirname(os.path.abspath(self._path))
        os.makedirs(directory, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=directory, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            os.replace(tmp_path, self._path)
        except BaseException:
            os.unlink(tmp_path)
            raise

    def read(self, key: str) -> dict[str, Any] | None:
        return self._load().get(key)

    def write(self, key: str, value: dict[str, Any]) -> None:
        data = self._load()
        data[key] = value
        self._dump(data)

    def clear(self, key: str) -> None:
        data = self._load()
        if key in data:
            del data[key]
            self._dump(data)
