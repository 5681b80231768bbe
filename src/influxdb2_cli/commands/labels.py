"""Label management commands."""

from typing import Optional

import typer

from influxdb2_cli.api.client import get_client
from influxdb2_cli.api.labels import LabelsAPI
from influxdb2_cli.utils import exit_codes
from influxdb2_cli.utils.ui.formatters import format_error, format_output, format_success

from .decorators import AppError, command_wrapper
from .utils import OUTPUT_OPTION, PROFILE_OPTION, dump, resolve_output

app = typer.Typer(help="Label management commands", no_args_is_help=True)

PROPERTY_OPTION_HELP = "Label property as KEY=VALUE, may be repeated"


def parse_properties(values: Optional[list[str]]) -> Optional[dict[str, str]]:
    """Turn repeated KEY=VALUE options into a dict, or None if there are none."""
    if not values:
        return None

    properties: dict[str, str] = {}
    for item in values:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise AppError(
                f"Invalid property '{item}', expected KEY=VALUE",
                exit_codes.ERROR_INVALID_ARGS,
            )
        properties[key] = value
    return properties


@app.command("list")
@command_wrapper
async def list_labels(
    org_id: Optional[str] = typer.Option(
        None, "--org-id", help="Only labels of this organization ID"
    ),
    output: Optional[str] = OUTPUT_OPTION,
    profile: str = PROFILE_OPTION,
) -> None:
    """List labels."""
    output_format = resolve_output(output, profile)
    async with get_client(profile) as client:
        api = LabelsAPI(client)
        if org_id:
            response = await api.list_labels_by_org(org_id)
        else:
            response = await api.list_labels()
    format_output([dump(label) for label in response.labels], output_format)


@app.command("get")
@command_wrapper
async def get_label(
    label_id: str = typer.Argument(..., help="Label ID"),
    output: Optional[str] = OUTPUT_OPTION,
    profile: str = PROFILE_OPTION,
) -> None:
    """Get label details."""
    output_format = resolve_output(output, profile)
    async with get_client(profile) as client:
        response = await LabelsAPI(client).find_label(label_id)
    format_output(dump(response.label) if response.label else {}, output_format)


@app.command("create")
@command_wrapper
async def create_label(
    name: str = typer.Argument(..., help="Label name"),
    org_id: str = typer.Option(..., "--org-id", help="Owning organization ID"),
    properties: Optional[list[str]] = typer.Option(
        None, "--property", help=PROPERTY_OPTION_HELP
    ),
    output: Optional[str] = OUTPUT_OPTION,
    profile: str = PROFILE_OPTION,
) -> None:
    """Create a new label."""
    output_format = resolve_output(output, profile)
    props = parse_properties(properties)
    async with get_client(profile) as client:
        response = await LabelsAPI(client).create_label(org_id, name, props)

    label_id = response.label.id if response.label else None
    format_success(f"Label created: {label_id}")
    if response.label:
        format_output(dump(response.label), output_format)


@app.command("update")
@command_wrapper
async def update_label(
    label_id: str = typer.Argument(..., help="Label ID"),
    name: Optional[str] = typer.Option(None, "--name", help="New label name"),
    properties: Optional[list[str]] = typer.Option(
        None, "--property", help=PROPERTY_OPTION_HELP
    ),
    output: Optional[str] = OUTPUT_OPTION,
    profile: str = PROFILE_OPTION,
) -> None:
    """Update a label."""
    output_format = resolve_output(output, profile)
    props = parse_properties(properties)
    if name is None and props is None:
        format_error("No updates specified")
        raise typer.Exit(exit_codes.ERROR_INVALID_ARGS)

    async with get_client(profile) as client:
        response = await LabelsAPI(client).update_label(
            label_id, name=name, properties=props
        )

    format_success(f"Label updated: {label_id}")
    if response.label:
        format_output(dump(response.label), output_format)


@app.command("delete")
@command_wrapper
async def delete_label(
    label_id: str = typer.Argument(..., help="Label ID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
    profile: str = PROFILE_OPTION,
) -> None:
    """Delete a label."""
    if not yes:
        confirm = typer.confirm(f"Are you sure you want to delete label {label_id}?")
        if not confirm:
            format_error("Cancelled")
            raise typer.Exit(0)

    async with get_client(profile) as client:
        await LabelsAPI(client).delete_label(label_id)
    format_success(f"Label deleted: {label_id}")
