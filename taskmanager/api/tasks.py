"""Task endpoints."""

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.concurrency import run_in_threadpool

from taskmanager.api.deps import get_task_store
from taskmanager.models.tasks import ErrorResponse, Task, TaskCreateRequest, TaskUpdateRequest
from taskmanager.services.task_store import TaskStore

router = APIRouter()

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}


@router.get("", response_model=list[Task])
async def list_tasks(store: TaskStore = Depends(get_task_store)) -> list[Task]:
    """List all tasks in insertion order."""
    return await run_in_threadpool(store.list_tasks)


@router.get("/{task_id}", response_model=Task, responses=_NOT_FOUND)
async def get_task(task_id: int, store: TaskStore = Depends(get_task_store)) -> Task:
    """Get a single task."""
    return await run_in_threadpool(store.get_task, task_id)


@router.post(
    "",
    response_model=Task,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
)
async def create_task(
    payload: TaskCreateRequest,
    request: Request,
    response: Response,
    store: TaskStore = Depends(get_task_store),
) -> Task:
    """Create a task; the Location header points at the new resource."""
    task = await run_in_threadpool(store.create_task, payload.description)
    response.headers["Location"] = str(request.url_for("get_task", task_id=task.id))
    return task


@router.put("/{task_id}", response_model=Task, responses=_NOT_FOUND)
async def update_task(
    task_id: int,
    payload: TaskUpdateRequest,
    store: TaskStore = Depends(get_task_store),
) -> Task:
    """Partially update a task."""
    return await run_in_threadpool(
        store.update_task,
        task_id,
        payload.description,
        payload.is_completed,
    )


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT, responses=_NOT_FOUND)
async def delete_task(task_id: int, store: TaskStore = Depends(get_task_store)) -> None:
    """Delete a task permanently."""
    await run_in_threadpool(store.delete_task, task_id)
