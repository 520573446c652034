"""Shared fixtures: a fresh application and store per test."""

from collections.abc import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from taskmanager.main import create_app
from taskmanager.services.task_store import TaskStore


@pytest.fixture
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture
def app(store: TaskStore) -> FastAPI:
    return create_app(store=store)


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client
