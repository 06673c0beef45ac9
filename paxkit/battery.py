"""Battery voltage averaging and the low-battery check."""

from __future__ import annotations

from typing import Iterable, Optional

_NO_BATTERY_MV = 1000


def average_voltage(samples: Iterable[int], divider: float = 1) -> int:
    """Average millivolt readings, scale by the voltage divider, as 16-bit mV."""
    readings = list(samples)
    if not readings:
        raise ValueError("at least one sample is needed")
    mean = sum(readings) // len(readings)
    return int(mean * divider) & 0xFFFF


def battery_sufficient(millivolts: Optional[int], minimum: int) -> bool:
    """True if there is no battery (or no measurement) or it is above ``minimum``."""
    if millivolts is None:
        return True
    return millivolts < _NO_BATTERY_MV or millivolts > minimum