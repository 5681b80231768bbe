"""Request and response models for the InfluxDB 2.x API.

Attribute names are snake_case; the camelCase names used on the wire are
declared as aliases, and every model accepts either on input.
"""

from .common import Links
from .label import Label, LabelCreateRequest, LabelResponse, LabelsResponse, LabelUpdate
from .task import (
    MAX_LIST_LIMIT,
    MIN_LIST_LIMIT,
    CreateTaskRequest,
    ListTasksRequest,
    Task,
    Tasks,
    TaskStatusType,
    TaskType,
)

__all__ = [
    "Links",
    # Label models
    "Label",
    "LabelCreateRequest",
    "LabelResponse",
    "LabelsResponse",
    "LabelUpdate",
    # Task models
    "Task",
    "Tasks",
    "TaskStatusType",
    "TaskType",
    "ListTasksRequest",
    "CreateTaskRequest",
    "MIN_LIST_LIMIT",
    "MAX_LIST_LIMIT",
]
