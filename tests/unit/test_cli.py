#
# tests/unit/test_cli.py
#
"""
Tests for the rpbasic command line interface.
"""

from pathlib import Path
from unittest.mock import patch

import httpx
import pytest
from click.testing import CliRunner

from rpbasic.cli.main import cli
from rpbasic.client import RunStateClient
from rpbasic.transport import HttpTransport

API = "/api/v1/demo"


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def patched_client(server):
    """Routes CLI-built clients to the recording server."""

    def build(config):
        http_client = httpx.Client(base_url=config.base_uri, transport=httpx.MockTransport(server.handler))
        return RunStateClient(config, transport=HttpTransport(config, client=http_client))

    with patch("rpbasic.cli.run_cmds.RunStateClient", side_effect=build) as factory:
        yield factory


class TestCLIBasics:
    def test_help_lists_command_groups(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        for group in ("config", "launch", "item"):
            assert group in result.output

    def test_unknown_command(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["report"])
        assert result.exit_code != 0


class TestConfigShow:
    def test_shows_config_without_token(self, runner: CliRunner, config_file: Path) -> None:
        result = runner.invoke(cli, ["config", "show", "-c", str(config_file)])

        assert result.exit_code == 0, result.output
        assert "demo" in result.output
        assert "http://rp.example.com/api/v1/demo/" in result.output
        assert "secret-token" not in result.output

    def test_reports_configuration_problem(self, runner: CliRunner, tmp_path: Path) -> None:
        bad = tmp_path / "bad.yml"
        bad.write_text("host: h\n", encoding="utf-8")

        result = runner.invoke(cli, ["config", "show", "-c", str(bad)])

        assert result.exit_code == 1
        assert "Error: Configuration problem" in result.output

    def test_config_path_from_environment(self, runner: CliRunner, config_file: Path) -> None:
        result = runner.invoke(cli, ["config", "show"], env={"RPBASIC_CONF": str(config_file)})
        assert result.exit_code == 0, result.output


class TestCleanupCommands:
    def test_launch_stop(self, runner: CliRunner, config_file: Path, server, patched_client) -> None:
        result = runner.invoke(cli, ["launch", "stop", "L-42", "-c", str(config_file)])

        assert result.exit_code == 0, result.output
        assert server.calls == [("PUT", f"{API}/launch/L-42/stop")]
        assert server.json_bodies()[0]["status"] == "CANCELLED"
        assert "HTTP 200" in result.output

    def test_launch_finish_with_status(self, runner: CliRunner, config_file: Path, server, patched_client) -> None:
        result = runner.invoke(cli, ["launch", "finish", "L-42", "--status", "failed", "-c", str(config_file)])

        assert result.exit_code == 0, result.output
        assert server.calls == [("PUT", f"{API}/launch/L-42/finish")]
        assert server.json_bodies()[0]["status"] == "FAILED"

    def test_item_finish(self, runner: CliRunner, config_file: Path, server, patched_client) -> None:
        result = runner.invoke(
            cli, ["item", "finish", "I-7", "--description", "cleanup", "-c", str(config_file)]
        )

        assert result.exit_code == 0, result.output
        assert server.calls == [("PUT", f"{API}/item/I-7")]
        assert server.json_bodies()[0]["description"] == "cleanup"
        assert server.json_bodies()[0]["status"] == "CANCELLED"

    def test_error_status_exits_non_zero(self, runner: CliRunner, config_file: Path, server, patched_client) -> None:
        server.overrides[("PUT", f"{API}/item/I-7")] = lambda r: httpx.Response(
            404, json={"message": "Test Item 'I-7' not found."}
        )

        result = runner.invoke(cli, ["item", "finish", "I-7", "-c", str(config_file)])

        assert result.exit_code == 1
        assert "HTTP 404" in result.output
