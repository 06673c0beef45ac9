"""A 64-bit uptime counter built from a wrapping 32-bit millisecond tick."""

from __future__ import annotations

_MASK = 0xFFFFFFFF


class UptimeCounter:
    """Extends a 32-bit millisecond counter so it survives roll-over.

    :meth:`update` must be called at least once per wrap period
    (about 49 days) for the high word to stay correct.
    """

    def __init__(self) -> None:
        self._low = 0
        self._high = 0

    def update(self, millis: int) -> int:
        """Feed the current 32-bit millisecond reading; return 64-bit uptime."""
        low = millis & _MASK
        if low < self._low:
            self._high += 1
        self._low = low
        return (self._high << 32) | low