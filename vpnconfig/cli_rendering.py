"""CLI output and error rendering helpers.

This module centralizes user-facing presentation of load diagnostics and of
the effective configuration record.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .config import LoadReport
from .errors import ConfigError, ConfigOSError
from .models.datatypes import CONFIG_KEYS_BY_NAME, TriState, VpnConfig


_SECRET_MASK = "********"


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, ConfigError):
        location = f" `{exc.path}`" if exc.path else ""
        typer.secho(
            f"{command_name} failed: Failed to read config file{location}: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if isinstance(exc, ConfigOSError) and exc.errno is not None:
            typer.secho(f"errno: {exc.errno}", fg=typer.colors.RED, err=True)
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def format_config_value(key: str, value: object) -> str:
    """Render one record value as it would be written in a config file."""

    config_key = CONFIG_KEYS_BY_NAME.get(key)
    if config_key is not None and config_key.secret:
        return _SECRET_MASK
    if isinstance(value, TriState):
        return "true" if value is TriState.TRUE else "false"
    return str(value)


def echo_config(config: VpnConfig) -> None:
    """Print every explicitly set field as a `key = value` line."""

    for key, value in config.explicit_items():
        typer.echo(f"{key} = {format_config_value(key, value)}")


def echo_load_summary(report: LoadReport) -> None:
    """Print the outcome of loading one file."""

    typer.echo(f"OK: {report.path}")
    typer.echo(f"Keys assigned: {len(report.assigned_keys)}")
    typer.echo(f"Warnings: {len(report.warnings)}")
