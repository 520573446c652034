"""HTTP client for the task API with a local mirror of the task list."""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from taskmanager.core.config import settings
from taskmanager.models.tasks import Task, TaskFilter

logger = logging.getLogger(__name__)


class TaskClient:
    """Calls the task endpoints and mirrors the resulting list locally.

    The mirror is filled by :meth:`load` and afterwards patched from each
    mutating call's response, without re-fetching. Failures never raise:
    they set :attr:`error` and leave the mirror untouched so the caller can
    retry.
    """

    def __init__(self, http: httpx.Client | None = None, base_url: str | None = None) -> None:
        """Initialize the client.

        Args:
            http: HTTP client to issue requests with. When omitted, one is
                created and closed by :meth:`close`.
            base_url: Tasks collection URL. Defaults to ``settings.TASK_API_URL``
                for an owned client and to ``/api/tasks`` (relative to the
                client's own base URL) when ``http`` is given.
        """
        self._owns_http = http is None
        if http is None:
            http = httpx.Client(timeout=settings.CLIENT_TIMEOUT)
            self._path = (base_url or settings.TASK_API_URL).rstrip("/")
        else:
            self._path = (base_url or "/api/tasks").rstrip("/")
        self._http = http
        self.tasks: list[Task] = []
        self.error: str | None = None

    def __enter__(self) -> TaskClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    # ------------------------------------------------------------------
    # Remote operations
    # ------------------------------------------------------------------

    def load(self) -> bool:
        """Replace the mirror with the server's full list."""
        data = self._call(
            "GET",
            self._path,
            "Failed to fetch tasks. Please ensure the backend is running.",
        )
        if data is None:
            return False
        try:
            tasks = [Task.model_validate(item) for item in data]
        except (TypeError, ValidationError) as exc:
            self._fail("Failed to fetch tasks", exc)
            return False
        self.tasks = tasks
        return True

    refresh = load

    def add(self, description: str) -> Task | None:
        """Create a task and append it to the mirror.

        A blank description is ignored without contacting the server.
        """
        text = description.strip()
        if not text:
            return None
        task = self._task_call("POST", self._path, "Failed to add task", {"description": text})
        if task is not None:
            self.tasks.append(task)
        return task

    def set_completed(self, task_id: int, completed: bool) -> Task | None:
        return self._update(task_id, {"isCompleted": completed})

    def toggle(self, task_id: int) -> Task | None:
        """Flip the completion flag of a mirrored task."""
        current = self.find(task_id)
        if current is None:
            self.error = f"Task with ID {task_id} not found"
            return None
        return self.set_completed(task_id, not current.is_completed)

    def rename(self, task_id: int, description: str) -> Task | None:
        return self._update(task_id, {"description": description})

    def delete(self, task_id: int) -> bool:
        """Delete a task and drop it from the mirror."""
        response = self._send("DELETE", f"{self._path}/{task_id}", "Failed to delete task")
        if response is None:
            return False
        self.tasks = [t for t in self.tasks if t.id != task_id]
        return True

    # ------------------------------------------------------------------
    # Local views
    # ------------------------------------------------------------------

    def find(self, task_id: int) -> Task | None:
        return next((t for t in self.tasks if t.id == task_id), None)

    def visible(self, task_filter: TaskFilter | str = TaskFilter.ALL) -> list[Task]:
        """Mirrored tasks matching ``task_filter``, in mirror order."""
        task_filter = TaskFilter(task_filter)
        return [t for t in self.tasks if task_filter.matches(t)]

    def counts(self) -> dict[str, int]:
        active = sum(1 for t in self.tasks if not t.is_completed)
        return {
            TaskFilter.ALL.value: len(self.tasks),
            TaskFilter.ACTIVE.value: active,
            TaskFilter.COMPLETED.value: len(self.tasks) - active,
        }

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _update(self, task_id: int, payload: dict[str, object]) -> Task | None:
        task = self._task_call("PUT", f"{self._path}/{task_id}", "Failed to update task", payload)
        if task is not None:
            self.tasks = [task if t.id == task_id else t for t in self.tasks]
        return task

    def _task_call(
        self, method: str, url: str, failure: str, payload: dict[str, object]
    ) -> Task | None:
        data = self._call(method, url, failure, payload)
        if data is None:
            return None
        try:
            return Task.model_validate(data)
        except ValidationError as exc:
            self._fail(failure, exc)
            return None

    def _call(
        self, method: str, url: str, failure: str, payload: dict[str, object] | None = None
    ) -> object | None:
        response = self._send(method, url, failure, payload)
        if response is None:
            return None
        try:
            data = response.json()
        except ValueError as exc:
            self._fail(failure, exc)
            return None
        if data is None:
            # Every endpoint read through here answers with a JSON body.
            self._fail(failure, None)
            logger.warning("%s %s returned an empty JSON body", method, url)
        return data

    def _send(
        self, method: str, url: str, failure: str, payload: dict[str, object] | None = None
    ) -> httpx.Response | None:
        self.error = None
        try:
            response = self._http.request(method, url, json=payload)
        except httpx.HTTPError as exc:
            self._fail(failure, exc)
            return None
        if response.is_success:
            return response
        self._fail(_server_message(response) or failure, None)
        logger.warning("%s %s returned %d", method, url, response.status_code)
        return None

    def _fail(self, message: str, exc: Exception | None) -> None:
        self.error = message
        if exc is not None:
            logger.error("%s: %s", message, exc)


def _server_message(response: httpx.Response) -> str | None:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("message"), str):
        return body["message"]
    return None
