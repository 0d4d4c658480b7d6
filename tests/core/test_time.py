from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

from vedicclock.core.time import elapsed_seconds, ensure_utc, local_midnight

IST = timezone(timedelta(hours=5, minutes=30))


def test_ensure_utc() -> None:
    assert ensure_utc(datetime(2024, 1, 1, 12)) == datetime(2024, 1, 1, 12, tzinfo=UTC)
    assert ensure_utc(datetime(2024, 1, 1, 5, 30, tzinfo=IST)) == datetime(2024, 1, 1, tzinfo=UTC)


def test_local_midnight_keeps_offset() -> None:
    moment = datetime(2024, 1, 1, 3, 0, tzinfo=IST)
    assert local_midnight(moment) == datetime(2024, 1, 1, tzinfo=IST)
    assert local_midnight(moment, days=-1) == datetime(2023, 12, 31, tzinfo=IST)
    assert local_midnight(datetime(2024, 1, 1, 23, 59)) == datetime(2024, 1, 1, tzinfo=UTC)


def test_elapsed_seconds_mixes_offsets() -> None:
    start = datetime(2024, 1, 1, tzinfo=UTC)
    end = datetime(2024, 1, 1, 6, 30, tzinfo=IST)
    assert elapsed_seconds(start, end) == 3600.0
