"""Persistence backends for the task list.

A store holds the whole list as one JSON array of strings. It is read once
when the service starts and overwritten in full on every mutation.
"""
import json
import os
import tempfile
from pathlib import Path

from logging_setup import get_logger

logger = get_logger(__name__)


class StorageError(Exception):
    pass


class MemoryStore:
    def __init__(self, todos=None):
        self._todos = list(todos or [])

    def load(self) -> list[str]:
        return list(self._todos)

    def save(self, todos: list[str]) -> None:
        self._todos = list(todos)


class JsonFileStore:
    def __init__(self, path: str | Path):
        self.path = Path(path)

    def load(self) -> list[str]:
        if not self.path.exists():
            logger.debug("no data file at %s, starting empty", self.path)
            return []
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise StorageError(f"{self.path} is not valid JSON: {e}") from e
        if not isinstance(data, list) or not all(isinstance(t, str) for t in data):
            raise StorageError(f"{self.path} must hold a JSON array of strings")
        logger.debug("loaded %d tasks from %s", len(data), self.path)
        return data

    def save(self, todos: list[str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # write-then-rename: readers see the old list or the new one
        fd, tmp = tempfile.mkstemp(dir=self.path.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(todos, f)
            os.replace(tmp, self.path)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise
        logger.debug("saved %d tasks to %s", len(todos), self.path)


def open_store(path):
    """JSON file store for a non-empty path, in-memory store otherwise."""
    if path:
        return JsonFileStore(path)
    return MemoryStore()
