"""Task API models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, StrictBool
from pydantic.alias_generators import to_camel


class Task(BaseModel):
    """A tracked task.

    Serialized with camelCase keys; the store builds it by attribute name.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int = Field(ge=1, description="Store-assigned identifier")
    description: str = Field(min_length=1, description="Trimmed, non-empty description")
    is_completed: bool = Field(default=False, description="Completion flag")


class _RequestModel(BaseModel):
    """Request body accepting only the camelCase wire keys."""

    model_config = ConfigDict(alias_generator=to_camel, extra="forbid")


class TaskCreateRequest(_RequestModel):
    """Payload for creating a task.

    A missing or null description is treated like an empty one and rejected by the store.
    """

    description: str | None = Field(default=None, description="Task description")


class TaskUpdateRequest(_RequestModel):
    """Partial update payload.

    ``None`` means the field was not supplied. A blank description is also
    treated as "no change".
    """

    description: str | None = Field(default=None, description="Replacement description")
    is_completed: StrictBool | None = Field(default=None, description="Replacement completion flag")


class ErrorResponse(BaseModel):
    """Error body returned by every failing endpoint."""

    message: str


class TaskFilter(str, Enum):
    """Client-side view filter."""

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"

    def matches(self, task: Task) -> bool:
        if self is TaskFilter.ACTIVE:
            return not task.is_completed
        if self is TaskFilter.COMPLETED:
            return task.is_completed
        return True
