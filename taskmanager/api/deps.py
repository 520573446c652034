"""Request dependencies."""

from fastapi import Request

from taskmanager.services.task_store import TaskStore


def get_task_store(request: Request) -> TaskStore:
    """Return the store owned by the running application."""
    return request.app.state.task_store
