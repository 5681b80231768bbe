"""Task data models."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .common import Links
from .label import Label

# Bounds of the list tasks `limit` filter
MIN_LIST_LIMIT = 1
MAX_LIST_LIMIT = 500


class TaskStatusType(str, Enum):
    """Whether a task is scheduled to run."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class TaskType(str, Enum):
    """Kind of task."""

    BASIC = "basic"
    SYSTEM = "system"


class Task(BaseModel):
    """A task as returned by the API.

    Scheduling fields (``every``, ``cron``, ``offset``) are kept as the
    server sends them.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str
    org_id: str | None = Field(default=None, alias="orgID")
    org: str | None = None
    name: str | None = None
    owner_id: str | None = Field(default=None, alias="ownerID")
    description: str | None = None
    status: TaskStatusType | None = None
    labels: list[Label] = Field(default_factory=list)
    authorization_id: str | None = Field(default=None, alias="authorizationID")
    flux: str | None = None
    every: str | None = None
    cron: str | None = None
    offset: str | None = None
    latest_completed: datetime | None = Field(default=None, alias="latestCompleted")
    last_run_status: str | None = Field(default=None, alias="lastRunStatus")
    last_run_error: str | None = Field(default=None, alias="lastRunError")
    created_at: datetime | None = Field(default=None, alias="createdAt")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")
    links: dict[str, str] | None = None


class Tasks(BaseModel):
    """A page of tasks with its links."""

    tasks: list[Task] = Field(default_factory=list)
    links: Links | None = None


class ListTasksRequest(BaseModel):
    """Filters for listing tasks. Only fields that are set become query parameters."""

    model_config = ConfigDict(populate_by_name=True)

    after: str | None = None
    limit: int | None = Field(default=None, ge=MIN_LIST_LIMIT, le=MAX_LIST_LIMIT)
    name: str | None = None
    org: str | None = None
    org_id: str | None = Field(default=None, alias="orgID")
    status: TaskStatusType | None = None
    task_type: TaskType | None = Field(default=None, alias="type")
    user: str | None = None


class CreateTaskRequest(BaseModel):
    """Body sent to create a task."""

    model_config = ConfigDict(populate_by_name=True)

    flux: str
    description: str | None = None
    org: str | None = None
    org_id: str | None = Field(default=None, alias="orgID")
    status: TaskStatusType | None = None
