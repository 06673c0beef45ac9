"""Encoding of DCF77 time-signal frames (one bit per second of a minute)."""

from __future__ import annotations

import enum

from paxkit.timelib import break_time, tm_year_to_calendar

FRAME_SIZE = 60


class DcfBit(enum.IntEnum):
    """Pulse kind sent in one second of a DCF77 minute."""

    ZERO = 0  # 100 ms pulse
    ONE = 1  # 200 ms pulse
    MARK = 2  # no pulse: minute marker


def bcd_bits(value: int, count: int) -> tuple[DcfBit, ...]:
    """Encode ``value`` (0-99) as BCD in ``count`` bits, least significant first."""
    if not 0 <= value <= 99:
        raise ValueError(f"value out of BCD range: {value}")
    data = value if value < 10 else ((value // 10) << 4) + value % 10
    if data >> count:
        raise ValueError(f"value {value} does not fit into {count} bits")
    return tuple(DcfBit.ONE if (data >> i) & 1 else DcfBit.ZERO for i in range(count))


def parity_bit(count: int) -> DcfBit:
    """Even parity bit for a field holding ``count`` one-bits."""
    return DcfBit.ONE if count & 1 else DcfBit.ZERO


def _ones(bits: tuple[DcfBit, ...]) -> int:
    return sum(1 for b in bits if b is DcfBit.ONE)


def dcf77_frame(local_time: int, is_dst: bool) -> tuple[DcfBit, ...]:
    """Build the 60 pulses that announce the minute of ``local_time``.

    ``local_time`` is seconds since 1 Jan 1970 already shifted to local
    time; ``is_dst`` tells whether daylight saving time is in effect.
    """
    tm = break_time(local_time)
    bits = [DcfBit.ZERO] * FRAME_SIZE

    def put(start: int, value: int, count: int) -> tuple[DcfBit, ...]:
        field = bcd_bits(value, count)
        bits[start : start + count] = field
        return field

    # second 16 (DST change announcement) is not encoded
    bits[17] = DcfBit.ONE if is_dst else DcfBit.ZERO
    bits[18] = DcfBit.ZERO if is_dst else DcfBit.ONE
    bits[20] = DcfBit.ONE  # start of encoded time

    bits[28] = parity_bit(_ones(put(21, tm.minute, 7)))
    bits[35] = parity_bit(_ones(put(29, tm.hour, 6)))

    dow = tm.wday - 1 or 7  # Monday = 1 ... Sunday = 7
    date = (
        put(36, tm.day, 6)
        + put(42, dow, 3)
        + put(45, tm.month, 5)
        + put(50, tm_year_to_calendar(tm.year) - 2000, 8)
    )
    bits[58] = parity_bit(_ones(date))
    bits[59] = DcfBit.MARK  # leap seconds are not handled
    return tuple(bits)