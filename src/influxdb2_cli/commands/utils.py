"""Helpers shared by the command modules."""

from typing import Any

import typer
from pydantic import BaseModel

from influxdb2_cli.config import get_config_manager
from influxdb2_cli.utils import exit_codes
from influxdb2_cli.utils.ui.formatters import OUTPUT_FORMATS

from .decorators import AppError

PROFILE_OPTION = typer.Option("default", "--profile", "-p", help="Profile name")
OUTPUT_OPTION = typer.Option(
    None, "--output", "-o", help="Output format: table, json or yaml"
)


def resolve_output(output: str | None, profile: str) -> str:
    """Use the explicit output format, else the profile's configured one.

    Raises:
        AppError: If the format is not one of OUTPUT_FORMATS.
    """
    output_format = output or get_config_manager(profile).config.output.format
    if output_format not in OUTPUT_FORMATS:
        raise AppError(
            f"Unknown output format '{output_format}', expected one of: "
            + ", ".join(OUTPUT_FORMATS),
            exit_codes.ERROR_INVALID_ARGS,
        )
    return output_format


def dump(model: BaseModel) -> dict[str, Any]:
    """Model as a JSON-safe dict, without unset fields."""
    return model.model_dump(mode="json", exclude_none=True)
