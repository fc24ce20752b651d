# src/rpbasic/state.py
#
"""
Defines the run state tracked while reporting a launch to ReportPortal.
"""

import structlog
from attrs import field, mutable

# Logger specific to state management
log: structlog.stdlib.BoundLogger = structlog.get_logger("state")

# Reserved identifier meaning "no active item of this kind"
EMPTY_ID = "empty id"


@mutable(slots=True)
class RunState:
    """
    Holds the identifiers of the current launch and its open item chain.

    Owned by a single client instance. The chain launch -> root -> feature ->
    scenario -> step is implied by call order and is not enforced here.
    """

    # None when a launch creation response carried no id
    launch_id: str | None = field(default=EMPTY_ID)
    root_item_id: str = field(default=EMPTY_ID)
    feature_item_id: str = field(default=EMPTY_ID)
    scenario_item_id: str = field(default=EMPTY_ID)
    step_item_id: str = field(default=EMPTY_ID)

    @property
    def is_suite_running(self) -> bool:
        return self.root_item_id != EMPTY_ID

    @property
    def is_feature_running(self) -> bool:
        return self.feature_item_id != EMPTY_ID

    @property
    def is_scenario_running(self) -> bool:
        return self.scenario_item_id != EMPTY_ID

    @property
    def is_step_running(self) -> bool:
        return self.step_item_id != EMPTY_ID

    def set_launch_id(self, launch_id: str | None) -> None:
        """Records a new launch, replacing whichever one was current."""
        if launch_id is None:
            log.warning("Launch creation response carried no id; launch id is now unset")
        else:
            log.debug("Launch id set", launch_id=launch_id, previous=self.launch_id)
        self.launch_id = launch_id

    def set_root_item_id(self, item_id: str | None) -> None:
        self.root_item_id = self._normalize("root", item_id)

    def clear_root_item_id(self) -> None:
        log.debug("Root item id cleared", item_id=self.root_item_id)
        self.root_item_id = EMPTY_ID

    def set_feature_item_id(self, item_id: str | None) -> None:
        self.feature_item_id = self._normalize("feature", item_id)

    def clear_feature_item_id(self) -> None:
        self.feature_item_id = EMPTY_ID

    def set_scenario_item_id(self, item_id: str | None) -> None:
        self.scenario_item_id = self._normalize("scenario", item_id)

    def clear_scenario_item_id(self) -> None:
        self.scenario_item_id = EMPTY_ID

    def set_step_item_id(self, item_id: str | None) -> None:
        self.step_item_id = self._normalize("step", item_id)

    def clear_step_item_id(self) -> None:
        self.step_item_id = EMPTY_ID

    def reset(self) -> None:
        """Forgets the launch and every open item."""
        log.debug("Resetting run state", launch_id=self.launch_id)
        self.launch_id = EMPTY_ID
        self.root_item_id = EMPTY_ID
        self.feature_item_id = EMPTY_ID
        self.scenario_item_id = EMPTY_ID
        self.step_item_id = EMPTY_ID

    @staticmethod
    def _normalize(level: str, item_id: str | None) -> str:
        # Item ids never hold None: a missing id means nothing is running.
        if item_id is None:
            log.warning("Item creation response carried no id", level=level)
            return EMPTY_ID
        log.debug("Item id set", level=level, item_id=item_id)
        return item_id


# 🔼⚙️
