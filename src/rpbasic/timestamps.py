#
# src/rpbasic/timestamps.py
#
"""
Timestamp formatting for start_time, end_time and log time fields.
"""

from collections.abc import Callable
from datetime import datetime

FORMAT_DATE = "%Y-%m-%dT%H:%M:%S"

Clock = Callable[[], datetime]


def format_timestamp(time_zone: str, clock: Clock = datetime.now) -> str:
    """Local wall-clock time without offset, followed by the configured zone suffix."""
    return clock().strftime(FORMAT_DATE) + time_zone


# 🔼⚙️
