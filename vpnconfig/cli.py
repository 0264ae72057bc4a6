"""Command-line interface for inspecting VPN client configuration files.

Responsibilities:
- Check that a configuration file loads and report skipped lines.
- Show the effective configuration after layering override files.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import echo_config, echo_load_summary, exit_with_command_error
from .config import ConfigLoader, load_config
from .merge import merge_config
from .models.datatypes import invalid_config
from .telemetry.logger import configure_logging

app = typer.Typer(
    name="vpnconfig",
    no_args_is_help=True,
    help="Inspect VPN client configuration files.",
)

QuietOption = Annotated[
    bool,
    typer.Option(
        "--quiet/--verbose",
        help="Hide or show warnings about skipped configuration lines.",
    ),
]


def _configure_diagnostics(quiet: bool) -> None:
    """Send loader warnings to stderr unless quiet output was requested."""

    configure_logging(level="ERROR" if quiet else "WARNING")


@app.command("check")
def check_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Configuration file to validate."),
    ],
    quiet: QuietOption = False,
) -> None:
    """Load one configuration file and report how it was parsed."""

    _configure_diagnostics(quiet)
    try:
        report = load_config(invalid_config(), config_file)
    except Exception as exc:
        exit_with_command_error("check", exc)

    echo_load_summary(report)


@app.command("show")
def show_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Base configuration file."),
    ],
    overrides: Annotated[
        list[Path] | None,
        typer.Option(
            "--override",
            help="Configuration file layered on top of the base; repeatable, last wins.",
        ),
    ] = None,
    quiet: QuietOption = False,
) -> None:
    """Print the effective configuration with secrets masked."""

    _configure_diagnostics(quiet)
    try:
        config = ConfigLoader.from_file(config_file)
        for override_file in overrides or []:
            override = ConfigLoader.from_file(override_file)
            merge_config(config, override)
            override.destroy()
    except Exception as exc:
        exit_with_command_error("show", exc)

    echo_config(config)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
