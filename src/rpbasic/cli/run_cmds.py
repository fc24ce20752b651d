# src/rpbasic/cli/run_cmds.py

"""
Cleanup commands for launches and items left open by an interrupted run.
"""

from pathlib import Path

import click
import httpx
import structlog

from rpbasic.cli.utils import config_path_option
from rpbasic.client import RunStateClient
from rpbasic.config import load_config
from rpbasic.exceptions import ConfigurationError, TransportError
from rpbasic.statuses import ItemStatus
from rpbasic.telemetry import StructLogger

log: StructLogger = structlog.get_logger("cli.run")

STATUS_CHOICES = click.Choice([status.value for status in ItemStatus], case_sensitive=False)


def _build_client(ctx: click.Context, config_path: Path) -> RunStateClient:
    try:
        config = load_config(config_path)
    except ConfigurationError as e:
        click.echo(f"Error: Configuration problem in '{config_path}':\n{e}", err=True)
        ctx.exit(1)
    return RunStateClient(config)


def _report(ctx: click.Context, response: httpx.Response) -> None:
    """Echo the service response and exit non-zero for error statuses."""
    click.echo(f"HTTP {response.status_code}: {response.text}")
    if response.status_code >= 400:
        ctx.exit(1)


@click.group(name="launch")
def launch_cli():
    """Finish or stop a launch by id."""
    pass


@launch_cli.command(name="finish")
@click.argument("launch_id")
@click.option("--status", type=STATUS_CHOICES, default=ItemStatus.PASSED.value, show_default=True)
@config_path_option
@click.pass_context
def finish_launch(ctx: click.Context, launch_id: str, status: str, config_path: Path):
    """Gracefully finish LAUNCH_ID."""
    _finish_launch(ctx, launch_id, status.upper(), config_path, force=False)


@launch_cli.command(name="stop")
@click.argument("launch_id")
@click.option("--status", type=STATUS_CHOICES, default=ItemStatus.CANCELLED.value, show_default=True)
@config_path_option
@click.pass_context
def stop_launch(ctx: click.Context, launch_id: str, status: str, config_path: Path):
    """Force-finish LAUNCH_ID through the stop endpoint."""
    _finish_launch(ctx, launch_id, status.upper(), config_path, force=True)


def _finish_launch(ctx: click.Context, launch_id: str, status: str, config_path: Path, force: bool) -> None:
    log.info("Finishing launch from CLI", launch_id=launch_id, status=status, force=force)
    with _build_client(ctx, config_path) as client:
        client.state.set_launch_id(launch_id)
        try:
            response = client.force_finish_launch(status) if force else client.finish_launch(status)
        except TransportError as e:
            click.echo(f"Error: {e}", err=True)
            ctx.exit(1)
    _report(ctx, response)


@click.group(name="item")
def item_cli():
    """Finish test items by id."""
    pass


@item_cli.command(name="finish")
@click.argument("item_id")
@click.option("--status", type=STATUS_CHOICES, default=ItemStatus.CANCELLED.value, show_default=True)
@click.option("--description", default="", help="Description stored on the finished item.")
@config_path_option
@click.pass_context
def finish_item(ctx: click.Context, item_id: str, status: str, description: str, config_path: Path):
    """Finish ITEM_ID with the given status."""
    log.info("Finishing item from CLI", item_id=item_id, status=status)
    with _build_client(ctx, config_path) as client:
        try:
            response = client.finish_item(item_id, status.upper(), description)
        except TransportError as e:
            click.echo(f"Error: {e}", err=True)
            ctx.exit(1)
    _report(ctx, response)

# 🔼⚙️
