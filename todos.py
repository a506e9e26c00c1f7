"""The todo list service: the single owner of task state.

Positions passed to ``delete_at`` are 0-based. ``add`` reports the new
task's 1-based position, matching the numbering shown to users.
"""
import threading
from typing import NamedTuple

from logging_setup import get_logger
from storage import MemoryStore

MAX_TASK_LENGTH = 100

logger = get_logger(__name__)


class TodoError(Exception):
    pass


class ValidationError(TodoError):
    pass


class NotFoundError(TodoError):
    pass


class Added(NamedTuple):
    position: int
    todos: list[str]


class Deleted(NamedTuple):
    task: str
    todos: list[str]


def clean_task(text) -> str:
    if text is None:
        raise ValidationError("Task cannot be empty")
    if not isinstance(text, str):
        raise ValidationError("Task must be text")
    task = text.strip()
    if not task:
        raise ValidationError("Task cannot be empty")
    if len(task) > MAX_TASK_LENGTH:
        raise ValidationError(f"Task is too long! Maximum {MAX_TASK_LENGTH} characters.")
    if not task.isprintable():
        raise ValidationError("Task must be printable text")
    return task


class TodoList:
    def __init__(self, store=None):
        self._store = store if store is not None else MemoryStore()
        self._lock = threading.Lock()
        self._todos = []
        for item in self._store.load():
            try:
                self._todos.append(clean_task(item))
            except ValidationError as e:
                logger.warning("dropping stored task %r: %s", item, e)

    def __len__(self) -> int:
        with self._lock:
            return len(self._todos)

    def list(self) -> list[str]:
        with self._lock:
            return list(self._todos)

    def add(self, text) -> Added:
        try:
            task = clean_task(text)
        except ValidationError as e:
            logger.debug("rejected task %r: %s", text, e)
            raise
        with self._lock:
            todos = self._todos + [task]
            self._store.save(todos)
            self._todos = todos
            logger.info("added task %d: %s", len(todos), task)
            return Added(len(todos), list(todos))

    def delete_at(self, index: int) -> Deleted:
        with self._lock:
            # bool is an int subclass
            if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(self._todos):
                logger.debug("no task at index %r (have %d)", index, len(self._todos))
                raise NotFoundError("Task not found")
            task = self._todos[index]
            todos = self._todos[:index] + self._todos[index + 1:]
            self._store.save(todos)
            self._todos = todos
            logger.info("deleted task %d: %s", index + 1, task)
            return Deleted(task, list(todos))
