from concurrent.futures import ThreadPoolExecutor

import pytest

from taskmanager.core.errors import InvalidTaskError, TaskNotFoundError
from taskmanager.services.task_store import TaskStore


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("buy milk", "buy milk"),
        ("  buy milk  ", "buy milk"),
        ("\tcall mom\n", "call mom"),
    ],
)
def test_create_then_get_returns_trimmed_open_task(store: TaskStore, raw: str, expected: str) -> None:
    created = store.create_task(raw)
    fetched = store.get_task(created.id)
    assert fetched.description == expected
    assert fetched.is_completed is False
    assert fetched == created


@pytest.mark.parametrize("description", ["", "   ", "\n\t"])
def test_create_rejects_blank_description(store: TaskStore, description: str) -> None:
    store.create_task("existing")
    with pytest.raises(InvalidTaskError) as exc_info:
        store.create_task(description)
    assert exc_info.value.message == "Description is required"
    assert [t.description for t in store.list_tasks()] == ["existing"]


def test_rejected_create_does_not_consume_an_id(store: TaskStore) -> None:
    with pytest.raises(InvalidTaskError):
        store.create_task("  ")
    assert store.create_task("first").id == 1


def test_ids_are_never_reused_after_delete(store: TaskStore) -> None:
    a = store.create_task("A")
    b = store.create_task("B")
    store.delete_task(a.id)
    c = store.create_task("C")
    assert (a.id, b.id, c.id) == (1, 2, 3)


def test_list_preserves_insertion_order(store: TaskStore) -> None:
    a = store.create_task("A")
    store.create_task("B")
    store.delete_task(a.id)
    store.create_task("C")
    assert [(t.id, t.description) for t in store.list_tasks()] == [(2, "B"), (3, "C")]


def test_update_completion_only(store: TaskStore) -> None:
    task = store.create_task("write report")
    updated = store.update_task(task.id, description=None, is_completed=True)
    assert updated.is_completed is True
    assert updated.description == "write report"


@pytest.mark.parametrize("description", ["", "  "])
def test_blank_description_update_is_ignored(store: TaskStore, description: str) -> None:
    task = store.create_task("write report")
    updated = store.update_task(task.id, description=description, is_completed=False)
    assert updated.description == "write report"


def test_update_replaces_trimmed_description(store: TaskStore) -> None:
    task = store.create_task("write report")
    updated = store.update_task(task.id, description="  send report ")
    assert updated.description == "send report"
    assert updated.is_completed is False
    assert store.get_task(task.id).description == "send report"


def test_update_can_reopen_a_task(store: TaskStore) -> None:
    task = store.create_task("x")
    store.update_task(task.id, is_completed=True)
    assert store.update_task(task.id, is_completed=False).is_completed is False


def test_update_without_fields_returns_unchanged_task(store: TaskStore) -> None:
    task = store.create_task("x")
    assert store.update_task(task.id) == task


@pytest.mark.parametrize("operation", ["get", "update", "delete"])
def test_unknown_id_raises_not_found(store: TaskStore, operation: str) -> None:
    deleted = store.create_task("gone")
    store.delete_task(deleted.id)
    for task_id in (deleted.id, 99):
        with pytest.raises(TaskNotFoundError) as exc_info:
            if operation == "get":
                store.get_task(task_id)
            elif operation == "update":
                store.update_task(task_id, is_completed=True)
            else:
                store.delete_task(task_id)
        assert exc_info.value.task_id == task_id
        assert exc_info.value.message == f"Task with ID {task_id} not found"


def test_returned_tasks_are_copies(store: TaskStore) -> None:
    task = store.create_task("original")
    task.description = "mutated"
    store.list_tasks()[0].is_completed = True
    stored = store.get_task(task.id)
    assert stored.description == "original"
    assert stored.is_completed is False


def test_clear_keeps_id_counter(store: TaskStore) -> None:
    store.create_task("a")
    store.create_task("b")
    store.clear()
    assert store.count() == 0
    assert store.list_tasks() == []
    assert store.create_task("c").id == 3


def test_concurrent_creates_assign_unique_ids(store: TaskStore) -> None:
    with ThreadPoolExecutor(max_workers=8) as pool:
        tasks = list(pool.map(lambda i: store.create_task(f"task {i}"), range(200)))
    ids = sorted(t.id for t in tasks)
    assert ids == list(range(1, 201))
    assert store.count() == 200
