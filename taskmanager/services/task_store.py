"""In-memory task store."""

from __future__ import annotations

import logging
import threading

from taskmanager.core.errors import InvalidTaskError, TaskNotFoundError
from taskmanager.models.tasks import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """Owns the task collection and identifier assignment.

    Tasks live in a dict keyed by id, so lookups are direct while iteration
    keeps insertion order. Every operation holds ``self._lock``; identifiers
    are handed out under the same lock and are never reused.
    """

    def __init__(self) -> None:
        self._tasks: dict[int, Task] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def list_tasks(self) -> list[Task]:
        """Return every task in insertion order."""
        with self._lock:
            return [task.model_copy() for task in self._tasks.values()]

    def get_task(self, task_id: int) -> Task:
        """Return the task with ``task_id``.

        Raises:
            TaskNotFoundError: If no task has that identifier
        """
        with self._lock:
            return self._require(task_id).model_copy()

    def create_task(self, description: str | None) -> Task:
        """Store a new, not yet completed task.

        Raises:
            InvalidTaskError: If the description is empty after trimming
        """
        text = (description or "").strip()
        if not text:
            raise InvalidTaskError()

        with self._lock:
            task = Task(id=self._next_id, description=text, is_completed=False)
            self._next_id += 1
            self._tasks[task.id] = task
            logger.info("Created task %d", task.id)
            return task.model_copy()

    def update_task(
        self,
        task_id: int,
        description: str | None = None,
        is_completed: bool | None = None,
    ) -> Task:
        """Apply a partial update and return the updated task.

        A blank ``description`` leaves the current one in place.

        Raises:
            TaskNotFoundError: If no task has that identifier
        """
        with self._lock:
            task = self._require(task_id)
            if description is not None and description.strip():
                task.description = description.strip()
            if is_completed is not None:
                task.is_completed = is_completed
            logger.info("Updated task %d", task_id)
            return task.model_copy()

    def delete_task(self, task_id: int) -> None:
        """Remove the task with ``task_id``.

        Raises:
            TaskNotFoundError: If no task has that identifier
        """
        with self._lock:
            self._require(task_id)
            del self._tasks[task_id]
            logger.info("Deleted task %d", task_id)

    def count(self) -> int:
        with self._lock:
            return len(self._tasks)

    def clear(self) -> None:
        """Drop every task. The identifier counter is not reset."""
        with self._lock:
            self._tasks.clear()
            logger.info("Cleared task store")

    def _require(self, task_id: int) -> Task:
        task = self._tasks.get(task_id)
        if task is None:
            logger.debug("Task %d not found", task_id)
            raise TaskNotFoundError(task_id)
        return task
