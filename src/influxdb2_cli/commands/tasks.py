"""Task management commands."""

from pathlib import Path
from typing import Optional

import typer

from influxdb2_cli.api.client import get_client
from influxdb2_cli.api.tasks import TasksAPI
from influxdb2_cli.models import CreateTaskRequest, ListTasksRequest, TaskStatusType, TaskType
from influxdb2_cli.utils import exit_codes
from influxdb2_cli.utils.ui.formatters import format_error, format_output, format_success

from .decorators import AppError, command_wrapper
from .utils import OUTPUT_OPTION, PROFILE_OPTION, dump, resolve_output

app = typer.Typer(help="Task management commands", no_args_is_help=True)

# Columns shown in table output; json and yaml show everything
TABLE_COLUMNS = ("id", "name", "org", "status", "every", "cron", "last_run_status")


@app.command("list")
@command_wrapper
async def list_tasks(
    after: Optional[str] = typer.Option(None, "--after", help="Return tasks after this task ID"),
    limit: Optional[int] = typer.Option(None, "--limit", help="Number of tasks to return (1-500)"),
    name: Optional[str] = typer.Option(None, "--name", help="Filter by task name"),
    org: Optional[str] = typer.Option(None, "--org", help="Filter by organization name"),
    org_id: Optional[str] = typer.Option(None, "--org-id", help="Filter by organization ID"),
    status: Optional[TaskStatusType] = typer.Option(None, "--status", help="Filter by status"),
    task_type: Optional[TaskType] = typer.Option(None, "--type", help="Filter by task type"),
    user: Optional[str] = typer.Option(None, "--user", help="Filter by user ID"),
    output: Optional[str] = OUTPUT_OPTION,
    profile: str = PROFILE_OPTION,
) -> None:
    """List tasks."""
    output_format = resolve_output(output, profile)
    request = ListTasksRequest(
        after=after,
        limit=limit,
        name=name,
        org=org,
        org_id=org_id,
        status=status,
        task_type=task_type,
        user=user,
    )
    async with get_client(profile) as client:
        response = await TasksAPI(client).list_tasks(request)

    rows = [dump(task) for task in response.tasks]
    if output_format == "table":
        rows = [{col: row.get(col) for col in TABLE_COLUMNS} for row in rows]
    format_output(rows, output_format)


@app.command("create")
@command_wrapper
async def create_task(
    flux: Optional[str] = typer.Option(None, "--flux", help="Flux script of the task"),
    file: Optional[Path] = typer.Option(
        None, "--file", "-f", exists=True, dir_okay=False, help="Read the Flux script from a file"
    ),
    description: Optional[str] = typer.Option(None, "--description", help="Task description"),
    org: Optional[str] = typer.Option(None, "--org", help="Owning organization name"),
    org_id: Optional[str] = typer.Option(None, "--org-id", help="Owning organization ID"),
    status: Optional[TaskStatusType] = typer.Option(None, "--status", help="Initial status"),
    profile: str = PROFILE_OPTION,
) -> None:
    """Create a new task."""
    if (flux is None) == (file is None):
        raise AppError("Give exactly one of --flux or --file", exit_codes.ERROR_INVALID_ARGS)
    script = flux if flux is not None else file.read_text(encoding="utf-8")

    async with get_client(profile) as client:
        # Without an explicit owner, fall back to the profile's organization
        if org is None and org_id is None:
            org = client.org
        request = CreateTaskRequest(
            flux=script,
            description=description,
            org=org,
            org_id=org_id,
            status=status,
        )
        await TasksAPI(client).create_task(request)
    format_success("Task created")


@app.command("delete")
@command_wrapper
async def delete_task(
    task_id: str = typer.Argument(..., help="Task ID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
    profile: str = PROFILE_OPTION,
) -> None:
    """Delete a task."""
    if not yes:
        confirm = typer.confirm(f"Are you sure you want to delete task {task_id}?")
        if not confirm:
            format_error("Cancelled")
            raise typer.Exit(0)

    async with get_client(profile) as client:
        await TasksAPI(client).delete_task(task_id)
    format_success(f"Task deleted: {task_id}")
