#
# src/rpbasic/reporter.py
#
"""
Feature / scenario / step bookkeeping on top of RunStateClient, in the shape
used by BDD framework hooks.
"""

from collections.abc import Sequence

import httpx
import structlog

from rpbasic.client import RunStateClient, get_value_from_response
from rpbasic.statuses import ItemType, LogLevel

log = structlog.get_logger("reporter")


class HierarchyReporter:
    """
    Opens and closes the levels below the suite, keeping the client's run
    state in step with what is currently running. A level is only started
    under a running parent; otherwise nothing is sent and None is returned.
    """

    def __init__(self, client: RunStateClient):
        self.client = client
        self.state = client.state

    def start_feature(self, name: str, description: str = "", tags: Sequence[str] = ()) -> httpx.Response | None:
        if not self.client.is_suite_running():
            log.warning("No suite running; feature not started", name=name)
            return None
        response = self.client.start_child_item(
            self.state.root_item_id, description, name, ItemType.STORY, tags
        )
        self.state.set_feature_item_id(get_value_from_response("id", response))
        return response

    def finish_feature(self, status: str, description: str = "") -> httpx.Response | None:
        if not self.client.is_feature_running():
            log.debug("No feature running; finish skipped")
            return None
        response = self.client.finish_item(self.state.feature_item_id, status, description)
        self.state.clear_feature_item_id()
        return response

    def start_scenario(self, name: str, description: str = "", tags: Sequence[str] = ()) -> httpx.Response | None:
        if not self.client.is_feature_running():
            log.warning("No feature running; scenario not started", name=name)
            return None
        response = self.client.start_child_item(
            self.state.feature_item_id, description, name, ItemType.SCENARIO, tags
        )
        self.state.set_scenario_item_id(get_value_from_response("id", response))
        return response

    def finish_scenario(self, status: str, description: str = "") -> httpx.Response | None:
        if not self.client.is_scenario_running():
            log.debug("No scenario running; finish skipped")
            return None
        response = self.client.finish_item(self.state.scenario_item_id, status, description)
        self.state.clear_scenario_item_id()
        return response

    def start_step(self, name: str, description: str = "", tags: Sequence[str] = ()) -> httpx.Response | None:
        if not self.client.is_scenario_running():
            log.warning("No scenario running; step not started", name=name)
            return None
        response = self.client.start_child_item(
            self.state.scenario_item_id, description, name, ItemType.STEP, tags
        )
        self.state.set_step_item_id(get_value_from_response("id", response))
        return response

    def finish_step(self, status: str, description: str = "") -> httpx.Response | None:
        if not self.client.is_step_running():
            log.debug("No step running; finish skipped")
            return None
        response = self.client.finish_item(self.state.step_item_id, status, description)
        self.state.clear_step_item_id()
        return response

    def log_step(self, message: str, level: str = LogLevel.INFO) -> httpx.Response | None:
        if not self.client.is_step_running():
            return None
        return self.client.add_log_message(self.state.step_item_id, message, level)

    def attach_screenshot(
        self,
        content: bytes,
        subtype: str = "png",
        message: str = "Screenshot",
        level: str = LogLevel.INFO,
    ) -> httpx.Response | None:
        return self.client.add_log_message_with_attachment(
            self.state.step_item_id, message, level, content, subtype
        )


# 🔼⚙️
