"""Decorators for command functions."""

import asyncio
import functools
import inspect
import time
import traceback
from collections.abc import Callable

import typer
from pydantic import ValidationError

from influxdb2_cli.api.exceptions import (
    DeserializationError,
    SerializationError,
    TransportError,
    UnexpectedStatusError,
)
from influxdb2_cli.config import get_config_manager
from influxdb2_cli.utils import exit_codes
from influxdb2_cli.utils.logger import get_logger
from influxdb2_cli.utils.ui.formatters import format_error


class AppError(Exception):
    """Custom application error with exit code."""

    def __init__(self, message: str, exit_code: int = exit_codes.ERROR_GENERAL):
        super().__init__(message)
        self.exit_code = exit_code


def _require_token(profile: str) -> None:
    """Fail early when the profile has no API token."""
    credentials = get_config_manager(profile).load_credentials()
    if not credentials or not credentials.get("token"):
        raise AppError(
            "No API token configured. Use 'influxdb2 config set-token' to add one.",
            exit_codes.ERROR_AUTH_FAILURE,
        )


def to_app_error(error: Exception) -> AppError | None:
    """Translate a client error into an AppError, or None if it is not one."""
    if isinstance(error, AppError):
        return error
    if isinstance(error, UnexpectedStatusError):
        return AppError(
            f"Server returned HTTP {error.status_code}: {error.text}",
            exit_codes.exit_code_for_status(error.status_code),
        )
    if isinstance(error, TransportError):
        return AppError(str(error), exit_codes.ERROR_NETWORK)
    if isinstance(error, DeserializationError):
        return AppError(str(error), exit_codes.ERROR_GENERAL)
    if isinstance(error, (SerializationError, ValidationError)):
        return AppError(str(error), exit_codes.ERROR_INVALID_ARGS)
    return None


def command_wrapper(_func: Callable | None = None, *, auth_required: bool = True):
    """Decorator to wrap command functions with common functionality."""

    def decorator(func: Callable):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            logger = get_logger()
            cmd = func.__name__
            start = time.monotonic()
            logger.info("command started: %s", cmd)
            try:
                if auth_required:
                    _require_token(kwargs.get("profile", "default"))

                if inspect.iscoroutinefunction(func):
                    result = asyncio.run(func(*args, **kwargs))
                else:
                    result = func(*args, **kwargs)

                elapsed = time.monotonic() - start
                logger.info("command completed: %s (%.3fs)", cmd, elapsed)
                return result

            except typer.Exit:
                # Typer's own exits (--help, explicit Exit(0))
                raise

            except Exception as e:
                elapsed = time.monotonic() - start
                app_error = to_app_error(e)
                if app_error is None:
                    logger.error(
                        "command failed: %s (%.3fs) - %s\n%s",
                        cmd,
                        elapsed,
                        str(e),
                        traceback.format_exc(),
                    )
                    format_error(f"An unexpected error occurred: {str(e)}")
                    raise typer.Exit(code=exit_codes.ERROR_GENERAL) from e

                logger.error(
                    "command failed: %s (%.3fs) [%s] - %s",
                    cmd,
                    elapsed,
                    exit_codes.get_exit_code_name(app_error.exit_code),
                    str(e),
                )
                format_error(str(app_error))
                raise typer.Exit(code=app_error.exit_code) from e

        return wrapper

    if _func is None:
        return decorator
    return decorator(_func)
