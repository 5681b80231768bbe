"""Configuration management commands."""

from typing import Optional

import typer
from rich.console import Console

from influxdb2_cli.config import get_config_manager
from influxdb2_cli.utils import exit_codes
from influxdb2_cli.utils.ui.formatters import format_error, format_output, format_success

from .decorators import AppError, command_wrapper
from .utils import OUTPUT_OPTION, PROFILE_OPTION, resolve_output

app = typer.Typer(help="Configuration management commands", no_args_is_help=True)
console = Console()


@app.command("show")
@command_wrapper(auth_required=False)
def show_config(
    output: Optional[str] = OUTPUT_OPTION,
    profile: str = PROFILE_OPTION,
) -> None:
    """Show the current configuration."""
    config_manager = get_config_manager(profile)
    format_output(config_manager.config.model_dump(), resolve_output(output, profile))


@app.command("get")
@command_wrapper(auth_required=False)
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., api.url)"),
    profile: str = PROFILE_OPTION,
) -> None:
    """Get a configuration value."""
    value = get_config_manager(profile).get(key)
    if value is None:
        raise AppError(f"Configuration key '{key}' not set", exit_codes.ERROR_NOT_FOUND)
    console.print(value)


@app.command("set")
@command_wrapper(auth_required=False)
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., api.url)"),
    value: str = typer.Argument(..., help="Configuration value"),
    profile: str = PROFILE_OPTION,
) -> None:
    """Set a configuration value.

    The value is converted to the setting's type, so ``api.timeout 10``
    stores a number and ``api.org 2024`` stays a string.
    """
    config_manager = get_config_manager(profile)
    try:
        config_manager.set(key, value)
    except KeyError:
        raise AppError(f"Unknown configuration key '{key}'", exit_codes.ERROR_INVALID_ARGS) from None
    format_success(f"Configuration '{key}' set to '{config_manager.get(key)}'")


@app.command("reset")
@command_wrapper(auth_required=False)
def reset_config(
    key: Optional[str] = typer.Argument(None, help="Configuration key to reset"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
    profile: str = PROFILE_OPTION,
) -> None:
    """Reset configuration to defaults."""
    if not yes:
        msg = "entire configuration" if not key else f"'{key}'"
        if not typer.confirm(f"Are you sure you want to reset {msg}?"):
            format_error("Cancelled")
            raise typer.Exit(0)

    try:
        get_config_manager(profile).reset(key)
    except KeyError:
        raise AppError(f"Unknown configuration key '{key}'", exit_codes.ERROR_INVALID_ARGS) from None

    if key:
        format_success(f"Configuration '{key}' reset to default")
    else:
        format_success("Configuration reset to defaults")


@app.command("set-token")
@command_wrapper(auth_required=False)
def set_token(
    token: str = typer.Option(
        ..., "--token", prompt=True, hide_input=True, help="API token"
    ),
    profile: str = PROFILE_OPTION,
) -> None:
    """Store the API token for a profile."""
    if not token.strip():
        raise AppError("Token cannot be empty", exit_codes.ERROR_INVALID_ARGS)
    get_config_manager(profile).save_credentials(token.strip())
    format_success(f"Token saved for profile '{profile}'")


@app.command("clear-token")
@command_wrapper(auth_required=False)
def clear_token(profile: str = PROFILE_OPTION) -> None:
    """Remove the stored API token of a profile."""
    get_config_manager(profile).clear_credentials()
    format_success(f"Token removed for profile '{profile}'")
