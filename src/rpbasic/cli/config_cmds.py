# src/rpbasic/cli/config_cmds.py

from pathlib import Path

import click
import structlog
from rich.pretty import pretty_repr

from rpbasic.cli.utils import config_path_option
from rpbasic.config import load_config
from rpbasic.exceptions import ConfigurationError
from rpbasic.telemetry import StructLogger

log: StructLogger = structlog.get_logger("cli.config")


@click.group(name="config")
def config_cli():
    """Commands for inspecting and validating configuration."""
    pass


@config_cli.command(name="show")
@config_path_option
@click.pass_context
def show_config(ctx: click.Context, config_path: Path):
    """Load, validate, and display the configuration."""
    log.info("Executing 'config show' command", config_path=str(config_path))

    try:
        config = load_config(config_path)
    except ConfigurationError as e:
        log.error("Failed to load or validate configuration", error=str(e))
        click.echo(f"Error: Configuration problem in '{config_path}':\n{e}", err=True)
        ctx.exit(1)

    # The access token is excluded from repr by the model.
    click.echo(pretty_repr(config, expand_all=True))
    click.echo(f"API endpoint: {config.base_uri}{config.project_path}/")

# 🔼⚙️
