"""Tasks API endpoints."""

from http import HTTPStatus
from typing import Optional
from urllib.parse import quote

from influxdb2_cli.api.client import SUCCESS, APIClient
from influxdb2_cli.models import CreateTaskRequest, ListTasksRequest, Tasks

TASKS_PATH = "/api/v2/tasks"


def _task_path(task_id: str) -> str:
    return f"{TASKS_PATH}/{quote(task_id, safe='')}"


class TasksAPI:
    """Tasks API client."""

    def __init__(self, client: APIClient):
        self.client = client

    async def list_tasks(self, request: Optional[ListTasksRequest] = None) -> Tasks:
        """List tasks, optionally filtered.

        Args:
            request: Filters to apply. Unset filters are not sent.
        """
        return await self.client.send(
            "GET",
            TASKS_PATH,
            expected_status=HTTPStatus.OK,
            result_type=Tasks,
            params=request,
        )

    async def create_task(self, request: CreateTaskRequest) -> None:
        """Create a new task."""
        await self.client.send(
            "POST",
            TASKS_PATH,
            expected_status=SUCCESS,
            body=request,
        )

    async def delete_task(self, task_id: str) -> None:
        """Delete a task."""
        await self.client.send(
            "DELETE",
            _task_path(task_id),
            expected_status=SUCCESS,
        )
