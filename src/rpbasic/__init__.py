#
# src/rpbasic/__init__.py
#
"""
rpbasic: reports test runs to ReportPortal over its REST API.
"""

from rpbasic.client import RunStateClient, get_value_from_response
from rpbasic.config import ReportPortalConfig, load_config
from rpbasic.conflicts import FinishConflict, detect_finish_conflict, parse_orphaned_item_ids
from rpbasic.exceptions import (
    ConfigurationError,
    ConflictParseError,
    MissingIdentifierError,
    ReportPortalHTTPError,
    RpBasicError,
    TransportError,
)
from rpbasic.reporter import HierarchyReporter
from rpbasic.state import EMPTY_ID, RunState
from rpbasic.statuses import ItemStatus, ItemType, LaunchMode, LogLevel
from rpbasic.transport import HttpTransport

__all__ = [
    "EMPTY_ID",
    "ConfigurationError",
    "ConflictParseError",
    "FinishConflict",
    "HierarchyReporter",
    "HttpTransport",
    "ItemStatus",
    "ItemType",
    "LaunchMode",
    "LogLevel",
    "MissingIdentifierError",
    "ReportPortalConfig",
    "ReportPortalHTTPError",
    "RpBasicError",
    "RunState",
    "RunStateClient",
    "TransportError",
    "detect_finish_conflict",
    "get_value_from_response",
    "load_config",
    "parse_orphaned_item_ids",
]

# 🔼⚙️
