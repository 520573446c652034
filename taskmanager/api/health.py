"""Health check endpoints."""

from fastapi import APIRouter, Depends

from taskmanager.api.deps import get_task_store
from taskmanager.services.task_store import TaskStore

router = APIRouter()


@router.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@router.get("/ready")
async def readiness_check(store: TaskStore = Depends(get_task_store)) -> dict[str, str | int]:
    """Readiness check endpoint."""
    return {"status": "ready", "tasks": store.count()}
