"""IF482 serial time telegrams for driving external clocks."""

from __future__ import annotations

from paxkit.timelib import TimeStatus, break_time, tm_year_to_calendar

FRAME_SIZE = 17


def monitoring_char(status: TimeStatus) -> str:
    """'A' for a synced time, 'M' when sync is overdue, '?' otherwise."""
    if status == TimeStatus.SET:
        return "A"
    if status == TimeStatus.NEEDS_SYNC:
        return "M"
    return "?"


def if482_frame(local_time: int, status: TimeStatus) -> str:
    """Build the 17 character telegram for ``local_time`` (local seconds)."""
    tm = break_time(local_time)
    yy = tm_year_to_calendar(tm.year) - 2000
    if not 0 <= yy <= 99:
        raise ValueError(f"year outside 2000-2099: {yy + 2000}")
    return (
        f"O{monitoring_char(status)}L"
        f"{yy:02d}{tm.month:02d}{tm.day:02d}{tm.wday:1d}"
        f"{tm.hour:02d}{tm.minute:02d}{tm.second:02d}\r"
    )