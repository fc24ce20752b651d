# src/rpbasic/client.py

"""
Client that reports a test run to ReportPortal while tracking which launch and
items are currently open.
"""

import json
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path
from typing import Any

import httpx
import structlog

from rpbasic.config import ReportPortalConfig, load_config
from rpbasic.conflicts import detect_finish_conflict, parse_orphaned_item_ids
from rpbasic.exceptions import ConflictParseError, MissingIdentifierError
from rpbasic.state import EMPTY_ID, RunState
from rpbasic.statuses import ItemStatus, ItemType, LaunchMode
from rpbasic.telemetry import StructLogger
from rpbasic.timestamps import Clock, format_timestamp
from rpbasic.transport import HttpTransport

log: StructLogger = structlog.get_logger("client")

CANCELLED_DESCRIPTION = "Cancelled due to error."
ATTACHMENT_NAME = "picture"


def get_value_from_response(key: str, response: httpx.Response) -> Any | None:
    """Top-level field of a JSON response body, or None when absent or unparsable."""
    try:
        payload = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None
    if not isinstance(payload, dict):
        return None
    return payload.get(key)


class RunStateClient:
    """
    Issues the ReportPortal requests for a launch and its item hierarchy.

    Every operation sends exactly one synchronous request (recovery aside) and
    returns the raw response for the caller to inspect. Identifiers received
    from creation responses are kept in ``state``.
    """

    def __init__(
        self,
        config: ReportPortalConfig,
        transport: HttpTransport | None = None,
        state: RunState | None = None,
        clock: Clock = datetime.now,
    ):
        self.config = config
        self.transport = transport or HttpTransport(config)
        self.state = state if state is not None else RunState()
        self._clock = clock
        self._log = log.bind(project=config.project_name)

    @classmethod
    def from_config_file(cls, config_path: Path | str) -> "RunStateClient":
        return cls(load_config(config_path))

    def __enter__(self) -> "RunStateClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self.transport.close()

    # --- Launch ---

    def start_launch(
        self,
        name: str,
        description: str = "",
        mode: str = LaunchMode.DEFAULT,
        tags: Sequence[str] = (),
    ) -> httpx.Response:
        response = self.transport.post_json(
            self._path("launch"),
            {
                "description": description,
                "mode": mode,
                "name": name,
                "start_time": self._now(),
                "tags": list(tags),
            },
        )
        self.state.set_launch_id(get_value_from_response("id", response))
        self._log.info("Launch started", name=name, launch_id=self.state.launch_id)
        return response

    def finish_launch(self, status: str) -> httpx.Response:
        return self._finish_launch("finish", status)

    def force_finish_launch(self, status: str) -> httpx.Response:
        """Stops the launch through the non-graceful endpoint."""
        return self._finish_launch("stop", status)

    def _finish_launch(self, action: str, status: str) -> httpx.Response:
        launch_id = self._require_launch_id(action)
        self._log.info("Finishing launch", launch_id=launch_id, action=action, status=str(status))
        return self.transport.put_json(
            self._path(f"launch/{launch_id}/{action}"),
            {"end_time": self._now(), "status": status},
        )

    # --- Suite (root item) ---

    def start_suite(self, name: str, description: str = "", tags: Sequence[str] = ()) -> httpx.Response:
        response = self.transport.post_json(
            self._path("item"),
            self._item_body(name, description, ItemType.SUITE, tags),
        )
        self.state.set_root_item_id(get_value_from_response("id", response))
        return response

    def finish_suite(self) -> httpx.Response | None:
        """
        Finishes the root item as PASSED, whatever its children reported.

        Returns None without sending anything when no suite is running.
        """
        if not self.is_suite_running():
            self._log.warning("finish_suite called with no running suite; nothing sent")
            return None
        response = self.finish_item(self.state.root_item_id, ItemStatus.PASSED, "")
        self.state.clear_root_item_id()
        return response

    def is_suite_running(self) -> bool:
        return self.state.is_suite_running

    # --- Generic items and logs ---

    def start_child_item(
        self,
        parent_id: str,
        description: str,
        name: str,
        item_type: str,
        tags: Sequence[str] = (),
    ) -> httpx.Response:
        return self.transport.post_json(
            self._path(f"item/{parent_id}"),
            self._item_body(name, description, item_type, tags),
        )

    def finish_item(self, item_id: str, status: str, description: str = "") -> httpx.Response:
        self._log.debug("Finishing item", item_id=item_id, status=str(status))
        return self.transport.put_json(
            self._path(f"item/{item_id}"),
            {"description": description, "end_time": self._now(), "status": status},
        )

    def add_log_message(self, item_id: str, message: str, log_level: str) -> httpx.Response:
        return self.transport.post_json(
            self._path("log"),
            {"item_id": item_id, "message": message, "time": self._now(), "level": log_level},
        )

    def add_log_message_with_attachment(
        self,
        item_id: str,
        message: str,
        log_level: str,
        content: bytes | str,
        content_subtype: str,
    ) -> httpx.Response | None:
        """
        Posts a log entry carrying an image, e.g. a screenshot.

        Only sent while a step is running; otherwise returns None.
        """
        if not self.is_step_running():
            self._log.debug("No step running; attachment not sent", item_id=item_id)
            return None

        json_part = json.dumps(
            [
                {
                    "file": {"name": ATTACHMENT_NAME},
                    "item_id": item_id,
                    "message": message,
                    "time": self._now(),
                    "level": log_level,
                }
            ]
        )
        files = {
            "json_request_part": (
                None,
                json_part,
                "application/json",
                {"Content-Transfer-Encoding": "8bit"},
            ),
            "binary_part": (
                ATTACHMENT_NAME,
                content,
                f"image/{content_subtype}",
                {"Content-Transfer-Encoding": "binary"},
            ),
        }
        return self.transport.post_multipart(self._path("log"), files)

    def is_step_running(self) -> bool:
        return self.state.is_step_running

    def is_scenario_running(self) -> bool:
        return self.state.is_scenario_running

    def is_feature_running(self) -> bool:
        return self.state.is_feature_running

    # --- Conflict recovery ---

    def recover_from_finish_conflict(self, response: httpx.Response) -> bool:
        """
        Cleans up after the service refused to finish a launch or item.

        Orphaned items named in the error message are finished as CANCELLED,
        then the launch is force-finished as CANCELLED. Makes one pass only.

        Returns:
            False if orphaned items were cancelled, True otherwise (including
            when no conflict was found and nothing was sent).
        """
        conflict = detect_finish_conflict(response.text)
        if conflict is None:
            return True

        recovery_log = self._log.bind(launch_id=self.state.launch_id, phrase=conflict.phrase)
        recovery_log.warning("Finish conflict reported by ReportPortal", message=conflict.message)

        try:
            orphaned_ids = parse_orphaned_item_ids(conflict.message)
        except ConflictParseError as e:
            recovery_log.error("Could not parse orphaned items; skipping item cancellation", error=str(e))
            orphaned_ids = []

        for item_id in orphaned_ids:
            self.finish_item(item_id, ItemStatus.CANCELLED, CANCELLED_DESCRIPTION)
        if orphaned_ids:
            recovery_log.warning("Cancelled orphaned items", count=len(orphaned_ids), item_ids=orphaned_ids)

        self.force_finish_launch(ItemStatus.CANCELLED)
        return not orphaned_ids

    # --- Helpers ---

    def _item_body(self, name: str, description: str, item_type: str, tags: Sequence[str]) -> dict[str, Any]:
        return {
            "description": description,
            "launch_id": self.state.launch_id,
            "name": name,
            "start_time": self._now(),
            "tags": list(tags),
            "type": item_type,
        }

    def _require_launch_id(self, action: str) -> str:
        launch_id = self.state.launch_id
        if launch_id is None or launch_id == EMPTY_ID:
            raise MissingIdentifierError(f"Cannot {action} launch: no launch id was received")
        return launch_id

    def _path(self, resource: str) -> str:
        return f"{self.config.project_path}/{resource}"

    def _now(self) -> str:
        return format_timestamp(self.config.time_zone, self._clock)


# 🔼⚙️
