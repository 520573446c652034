"""Domain errors raised by the task store."""

from __future__ import annotations


class TaskManagerError(Exception):
    """Base class for task manager errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidTaskError(TaskManagerError, ValueError):
    """Raised when a task field fails validation."""

    def __init__(self, message: str = "Description is required") -> None:
        super().__init__(message)


class TaskNotFoundError(TaskManagerError, LookupError):
    """Raised when no task carries the requested identifier."""

    def __init__(self, task_id: int, message: str | None = None) -> None:
        self.task_id = task_id
        if message is None:
            message = f"Task with ID {task_id} not found"
        super().__init__(message)
