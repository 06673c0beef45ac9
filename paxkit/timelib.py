"""Low level time and date functions working on seconds since 1 Jan 1970.

Years inside :class:`TimeElements` are stored as an offset from 1970, as
in the compact time element layout used by small clocks.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, Optional

SECS_PER_MIN = 60
SECS_PER_HOUR = 3600
SECS_PER_DAY = SECS_PER_HOUR * 24
DAYS_PER_WEEK = 7
SECS_PER_WEEK = SECS_PER_DAY * DAYS_PER_WEEK
SECS_PER_YEAR = SECS_PER_DAY * 365
SECS_YR_2000 = 946684800

_UINT32 = 0xFFFFFFFF
_MICROS_PER_SEC = 1_000_000
_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


class TimeStatus(enum.IntEnum):
    """Whether a clock has been set and recently synchronised."""

    NOT_SET = 0
    NEEDS_SYNC = 1
    SET = 2


@dataclass(frozen=True)
class TimeElements:
    """A broken-down time; ``year`` is the offset from 1970, ``wday`` 1 = Sunday."""

    second: int = 0
    minute: int = 0
    hour: int = 0
    wday: int = 0
    day: int = 0
    month: int = 0
    year: int = 0


def calendar_year_to_tm(year: int) -> int:
    """Convert a four digit year into an offset from 1970."""
    return year - 1970


def tm_year_to_calendar(year_offset: int) -> int:
    """Convert an offset from 1970 into a four digit year."""
    return year_offset + 1970


def is_leap_year(year_offset: int) -> bool:
    """Return True if the year ``1970 + year_offset`` is a leap year."""
    y = 1970 + year_offset
    return y > 0 and y % 4 == 0 and (y % 100 != 0 or y % 400 == 0)


def _days_in_year(year_offset: int) -> int:
    return 366 if is_leap_year(year_offset) else 365


def _days_to_wday(days: int) -> int:
    return (days + 4) % 7 + 1


def _check_time(t: int) -> int:
    if t < 0:
        raise ValueError(f"time must not be negative: {t}")
    return t


@lru_cache(maxsize=8)
def _break_time(t: int) -> TimeElements:
    second = t % 60
    t //= 60
    minute = t % 60
    t //= 60
    hour = t % 24
    days = t // 24

    wday = _days_to_wday(days)
    year = 0
    while days >= (length := _days_in_year(year)):
        days -= length
        year += 1

    leap = is_leap_year(year)
    month = 0
    while month < 12 and days >= (
        length := _MONTH_DAYS[month] + (1 if leap and month == 1 else 0)
    ):
        days -= length
        month += 1

    return TimeElements(
        second=second,
        minute=minute,
        hour=hour,
        wday=wday,
        day=days + 1,
        month=month + 1,
        year=year,
    )


def break_time(t: int) -> TimeElements:
    """Break seconds since the epoch into time elements."""
    return _break_time(_check_time(t))


def make_time(tm: TimeElements) -> int:
    """Assemble time elements into seconds since the epoch (32-bit)."""
    if not 0 <= tm.year <= 255:
        raise ValueError(f"year offset out of range: {tm.year}")
    if not 0 <= tm.month <= 12:
        raise ValueError(f"month out of range: {tm.month}")

    seconds = SECS_PER_DAY * 365 * tm.year
    seconds += SECS_PER_DAY * sum(1 for y in range(tm.year) if is_leap_year(y))
    for m in range(1, tm.month):
        if m == 2 and is_leap_year(tm.year):
            seconds += SECS_PER_DAY * 29
        else:
            seconds += SECS_PER_DAY * _MONTH_DAYS[m - 1]
    seconds += (tm.day - 1) * SECS_PER_DAY
    seconds += tm.hour * SECS_PER_HOUR
    seconds += tm.minute * SECS_PER_MIN
    seconds += tm.second
    return seconds & _UINT32


def day_of_week(t: int) -> int:
    """Day of week for ``t``, 1 = Sunday."""
    return (t // SECS_PER_DAY + 4) % DAYS_PER_WEEK + 1


def elapsed_days(t: int) -> int:
    """Number of days since 1 Jan 1970."""
    return t // SECS_PER_DAY


def elapsed_secs_today(t: int) -> int:
    """Seconds since the last midnight."""
    return t % SECS_PER_DAY


def previous_midnight(t: int) -> int:
    """Time at the start of the given day."""
    return (t // SECS_PER_DAY) * SECS_PER_DAY


def next_midnight(t: int) -> int:
    """Time at the end of the given day."""
    return previous_midnight(t) + SECS_PER_DAY


def elapsed_secs_this_week(t: int) -> int:
    """Seconds since the start of the week (weeks begin on Sunday)."""
    return elapsed_secs_today(t) + (day_of_week(t) - 1) * SECS_PER_DAY


def previous_sunday(t: int) -> int:
    """Time at the start of the week containing ``t``."""
    return t - elapsed_secs_this_week(t)


def next_sunday(t: int) -> int:
    """Time at the end of the week containing ``t``."""
    return previous_sunday(t) + SECS_PER_WEEK


def hour(t: int) -> int:
    """Hour of the day (0-23)."""
    return break_time(t).hour


def hour_format12(t: int) -> int:
    """Hour in 12 hour format (1-12)."""
    h = break_time(t).hour
    if h == 0:
        return 12
    if h > 12:
        return h - 12
    return h


def is_pm(t: int) -> bool:
    """True if ``t`` falls in the afternoon."""
    return hour(t) >= 12


def is_am(t: int) -> bool:
    """True if ``t`` falls before noon."""
    return not is_pm(t)


def minute(t: int) -> int:
    """Minute of the hour."""
    return break_time(t).minute


def second(t: int) -> int:
    """Second of the minute."""
    return break_time(t).second


def day(t: int) -> int:
    """Day of the month (1-31)."""
    return break_time(t).day


def weekday(t: int) -> int:
    """Day of the week, 1 = Sunday."""
    return break_time(t).wday


def month(t: int) -> int:
    """Month of the year, 1 = January."""
    return break_time(t).month


def year(t: int) -> int:
    """Full four digit year."""
    return tm_year_to_calendar(break_time(t).year)


class Clock:
    """A system clock driven by a free-running 32-bit microsecond counter.

    ``micros`` is a callable returning the counter value. An optional sync
    provider is polled whenever the sync interval has expired; it returns
    the current time, or 0/None when no time is available.
    """

    def __init__(self, micros: Callable[[], int]) -> None:
        self._micros = micros
        self._sys_time = 0
        self._prev_micros = 0
        self._next_sync_time = 0
        self._sync_interval = 300
        self._status = TimeStatus.NOT_SET
        self._provider: Optional[Callable[[], Optional[int]]] = None

    def now_with_micros(self) -> tuple[int, int]:
        """Return (seconds since epoch, microseconds into the current second)."""
        while True:
            elapsed = (self._micros() - self._prev_micros) & _UINT32
            if elapsed < _MICROS_PER_SEC:
                break
            self._sys_time += 1
            self._prev_micros = (self._prev_micros + _MICROS_PER_SEC) & _UINT32

        if self._next_sync_time <= self._sys_time and self._provider is not None:
            t = self._provider()
            if t:
                self.set_time(t)
            else:
                self._next_sync_time = self._sys_time + self._sync_interval
                if self._status != TimeStatus.NOT_SET:
                    self._status = TimeStatus.NEEDS_SYNC
        return self._sys_time, elapsed

    def now(self) -> int:
        """Current time as seconds since 1 Jan 1970."""
        return self.now_with_micros()[0]

    def millisecond(self) -> int:
        """Milliseconds into the current second."""
        return self.now_with_micros()[1] // 1000

    def microsecond(self) -> int:
        """Microseconds into the current second."""
        return self.now_with_micros()[1]

    def set_time(self, t: int) -> None:
        """Set the clock; the microsecond phase is kept (PPS disciplined)."""
        self._sys_time = t
        self._next_sync_time = t + self._sync_interval
        self._status = TimeStatus.SET

    def set_time_parts(
        self, hour: int, minute: int, second: int, day: int, month: int, year: int
    ) -> None:
        """Set the clock from parts; ``year`` may be four digits or two (2000-based)."""
        year_offset = calendar_year_to_tm(year) if year > 99 else year + 30
        t = make_time(
            TimeElements(
                second=second,
                minute=minute,
                hour=hour,
                day=day,
                month=month,
                year=year_offset,
            )
        )
        self.set_time(t)

    def adjust_time(self, adjustment: int) -> None:
        """Shift the clock by ``adjustment`` seconds."""
        self._sys_time += adjustment

    def status(self) -> TimeStatus:
        """Return the sync status, updating it first."""
        self.now()
        return self._status

    def set_sync_provider(self, provider: Optional[Callable[[], Optional[int]]]) -> None:
        """Install an external time provider and sync immediately."""
        self._provider = provider
        self._next_sync_time = self._sys_time
        self.now()

    def set_sync_interval(self, interval: int) -> None:
        """Set the number of seconds between re-syncs."""
        self._sync_interval = interval & _UINT32
        self._next_sync_time = self._sys_time + self._sync_interval

    def sync_to_pps(self) -> None:
        """Advance one second on a pulse-per-second edge and restart the phase."""
        self._sys_time += 1
        self._prev_micros = self._micros() & _UINT32