"""Async client for the InfluxDB 2.x HTTP API."""

from .client import SUCCESS, APIClient, get_client
from .exceptions import (
    APIError,
    DeserializationError,
    SerializationError,
    TransportError,
    UnexpectedStatusError,
)
from .labels import LabelsAPI
from .tasks import TasksAPI

__all__ = [
    "APIClient",
    "get_client",
    "SUCCESS",
    "LabelsAPI",
    "TasksAPI",
    "APIError",
    "TransportError",
    "SerializationError",
    "UnexpectedStatusError",
    "DeserializationError",
]
