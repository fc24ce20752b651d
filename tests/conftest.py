import json
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

import httpx
import pytest

from rpbasic.client import RunStateClient
from rpbasic.config import ReportPortalConfig
from rpbasic.transport import HttpTransport

FIXED_NOW = datetime(2024, 1, 1, 10, 0, 0)


class RecordingServer:
    """In-memory ReportPortal stand-in that records every request it receives."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.overrides: dict[tuple[str, str], Callable[[httpx.Request], httpx.Response]] = {}
        self._item_counter = 0

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, request.url.path)
        if key in self.overrides:
            return self.overrides[key](request)
        if request.method == "POST" and request.url.path.endswith("/launch"):
            return httpx.Response(201, json={"id": "launch-1"})
        if request.method == "POST" and "/item" in request.url.path:
            self._item_counter += 1
            return httpx.Response(201, json={"id": f"item-{self._item_counter}"})
        return httpx.Response(200, json={"message": "ok"})

    @property
    def calls(self) -> list[tuple[str, str]]:
        return [(r.method, r.url.path) for r in self.requests]

    def json_bodies(self) -> list[dict]:
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture
def rp_config() -> ReportPortalConfig:
    return ReportPortalConfig(
        uuid="secret-token",
        host="http://rp.example.com",
        project_name="demo",
        time_zone="+03:00",
    )


@pytest.fixture
def server() -> RecordingServer:
    return RecordingServer()


@pytest.fixture
def transport(rp_config: ReportPortalConfig, server: RecordingServer) -> HttpTransport:
    http_client = httpx.Client(
        base_url=rp_config.base_uri,
        headers={"Authorization": f"bearer {rp_config.uuid}"},
        transport=httpx.MockTransport(server.handler),
    )
    return HttpTransport(rp_config, client=http_client)


@pytest.fixture
def client(rp_config: ReportPortalConfig, transport: HttpTransport) -> RunStateClient:
    return RunStateClient(rp_config, transport=transport, clock=lambda: FIXED_NOW)


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "reportportal.yml"
    path.write_text(
        "UUID: secret-token\n"
        "host: http://rp.example.com\n"
        "projectName: demo\n"
        "timeZone: '+03:00'\n",
        encoding="utf-8",
    )
    return path
