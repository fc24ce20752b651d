# src/rpbasic/cli/main.py

"""
Main CLI entry point for rpbasic using Click.
Handles global options like logging level.
"""

from importlib.metadata import PackageNotFoundError, version

import click
import structlog

from rpbasic.cli.config_cmds import config_cli
from rpbasic.cli.run_cmds import item_cli, launch_cli
from rpbasic.cli.utils import logging_options, setup_logging_from_context
from rpbasic.telemetry import StructLogger

try:
    __version__ = version("rpbasic")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

log: StructLogger = structlog.get_logger("cli.main")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-V", "--version", package_name="rpbasic")
@logging_options
@click.pass_context
def cli(
    ctx: click.Context,
    log_level: str | None,
    log_file: str | None,
    json_logs: bool | None,
):
    """
    rpbasic: ReportPortal reporting client.

    Inspects configuration and cleans up launches or items left open by an
    interrupted test run.
    """
    ctx.ensure_object(dict)

    ctx.obj["LOG_LEVEL"] = log_level
    ctx.obj["LOG_FILE"] = log_file
    ctx.obj["JSON_LOGS"] = json_logs if json_logs is not None else False

    setup_logging_from_context(ctx, default_log_level="WARNING")
    log.debug(
        "Main CLI group initialized",
        log_level=log_level,
        log_file=log_file,
        json_logs=json_logs,
    )


cli.add_command(config_cli)
cli.add_command(launch_cli)
cli.add_command(item_cli)

if __name__ == "__main__":
    cli()

# 🖥️⚙️
