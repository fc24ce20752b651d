#
# src/rpbasic/statuses.py
#
"""
String enumerations for the values ReportPortal accepts in request bodies.
"""

from enum import StrEnum


class ItemStatus(StrEnum):
    """Statuses accepted when finishing a launch or test item."""

    PASSED = "PASSED"
    FAILED = "FAILED"
    STOPPED = "STOPPED"
    SKIPPED = "SKIPPED"
    CANCELLED = "CANCELLED"
    INTERRUPTED = "INTERRUPTED"
    INFO = "INFO"
    WARN = "WARN"


class ItemType(StrEnum):
    """Test item types used across the launch hierarchy."""

    SUITE = "SUITE"
    STORY = "STORY"  # Feature level in BDD runs
    TEST = "TEST"
    SCENARIO = "SCENARIO"
    STEP = "STEP"


class LaunchMode(StrEnum):
    DEFAULT = "DEFAULT"
    DEBUG = "DEBUG"


class LogLevel(StrEnum):
    """Log levels understood by the log endpoint."""

    TRACE = "trace"
    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    FATAL = "fatal"


# 🔼⚙️
