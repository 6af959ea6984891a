from __future__ import annotations

from datetime import datetime, timedelta, timezone

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_ONE_MS = timedelta(milliseconds=1)


def epoch_millis(dt: datetime) -> int:
    # naive datetimes are taken as UTC
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return (dt - EPOCH) // _ONE_MS


def relative_millis(delta: timedelta) -> int:
    """
    The console reads a negative `start` / `end` as an offset back from
    now, so the last 30 minutes is ``-1800000``.
    """
    return -(abs(delta) // _ONE_MS)


def to_millis(value: int | datetime | timedelta | None) -> int | None:
    if value is None:
        return None
    # bool is an int subclass, but never a meaningful timestamp
    if isinstance(value, bool):
        raise TypeError(f'expected int, datetime or timedelta, got {value!r}')
    if isinstance(value, int):
        return value
    if isinstance(value, datetime):
        return epoch_millis(value)
    if isinstance(value, timedelta):
        return relative_millis(value)

    raise TypeError('expected int, datetime or timedelta, '
                    f'got {type(value).__name__}')
