from datetime import datetime

from rpbasic.timestamps import format_timestamp


def test_appends_time_zone_suffix() -> None:
    clock = lambda: datetime(2024, 1, 1, 10, 0, 0, 123456)  # noqa: E731
    assert format_timestamp("+03:00", clock) == "2024-01-01T10:00:00+03:00"


def test_empty_zone_leaves_local_time() -> None:
    clock = lambda: datetime(2023, 12, 31, 23, 59, 59)  # noqa: E731
    assert format_timestamp("", clock) == "2023-12-31T23:59:59"
