"""Month and weekday names, long and three-letter forms."""

from __future__ import annotations

_MONTH_NAMES = (
    "",
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

_DAY_NAMES = (
    "Err",
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

_SHORT_LEN = 3
_MONTH_SHORT = "ErrJanFebMarAprMayJunJulAugSepOctNovDec"
_DAY_SHORT = "ErrSunMonTueWedThuFriSat"


def _check(value: int, limit: int, what: str) -> int:
    if not 0 <= value <= limit:
        raise ValueError(f"{what} out of range: {value}")
    return value


def month_str(month: int) -> str:
    """Full month name; month 0 gives an empty string."""
    return _MONTH_NAMES[_check(month, 12, "month")]


def month_short_str(month: int) -> str:
    """Three-letter month name; month 0 gives 'Err'."""
    start = _check(month, 12, "month") * _SHORT_LEN
    return _MONTH_SHORT[start : start + _SHORT_LEN]


def day_str(day: int) -> str:
    """Full weekday name, 1 = Sunday; day 0 gives 'Err'."""
    return _DAY_NAMES[_check(day, 7, "day")]


def day_short_str(day: int) -> str:
    """Three-letter weekday name, 1 = Sunday; day 0 gives 'Err'."""
    start = _check(day, 7, "day") * _SHORT_LEN
    return _DAY_SHORT[start : start + _SHORT_LEN]