import pytest
from hypothesis import given
from hypothesis import strategies as st

from paxkit.dcf77 import FRAME_SIZE, DcfBit, bcd_bits, dcf77_frame, parity_bit
from paxkit.timelib import (
    SECS_YR_2000,
    calendar_year_to_tm,
    day,
    hour,
    make_time,
    minute,
    month,
    weekday,
    year,
    TimeElements,
)

_TIMES = st.integers(min_value=SECS_YR_2000, max_value=SECS_YR_2000 + 98 * 365 * 86400)


def _decode(bits):
    data = sum(1 << i for i, b in enumerate(bits) if b is DcfBit.ONE)
    return (data >> 4) * 10 + (data & 0xF)


def _ones(bits):
    return sum(1 for b in bits if b is DcfBit.ONE)


def test_bcd_bits_of_27_in_seven_bits():
    one, zero = DcfBit.ONE, DcfBit.ZERO
    assert bcd_bits(27, 7) == (one, one, one, zero, zero, one, zero)


def test_bcd_bits_single_digit():
    assert bcd_bits(5, 4) == (DcfBit.ONE, DcfBit.ZERO, DcfBit.ONE, DcfBit.ZERO)


@pytest.mark.parametrize("value,count", [(100, 8), (-1, 8), (59, 3)])
def test_bcd_bits_rejects_unencodable(value, count):
    with pytest.raises(ValueError):
        bcd_bits(value, count)


@given(st.integers(min_value=0, max_value=99))
def test_bcd_round_trip(value):
    assert _decode(bcd_bits(value, 8)) == value


def test_parity_bit():
    assert parity_bit(0) is DcfBit.ZERO
    assert parity_bit(3) is DcfBit.ONE
    assert parity_bit(4) is DcfBit.ZERO


@given(_TIMES, st.booleans())
def test_frame_decodes_back_to_time(t, dst):
    frame = dcf77_frame(t, dst)
    assert len(frame) == FRAME_SIZE
    assert _decode(frame[21:28]) == minute(t)
    assert _decode(frame[29:35]) == hour(t)
    assert _decode(frame[36:42]) == day(t)
    assert _decode(frame[42:45]) == (weekday(t) - 1 or 7)
    assert _decode(frame[45:50]) == month(t)
    assert _decode(frame[50:58]) + 2000 == year(t)


@given(_TIMES, st.booleans())
def test_frame_parity_is_even(t, dst):
    frame = dcf77_frame(t, dst)
    assert _ones(frame[21:29]) % 2 == 0
    assert _ones(frame[29:36]) % 2 == 0
    assert _ones(frame[36:59]) % 2 == 0


@given(_TIMES, st.booleans())
def test_frame_fixed_bits(t, dst):
    frame = dcf77_frame(t, dst)
    assert all(b is DcfBit.ZERO for b in frame[:17])
    assert frame[19] is DcfBit.ZERO
    assert frame[20] is DcfBit.ONE
    assert frame[59] is DcfBit.MARK
    assert DcfBit.MARK not in frame[:59]


def test_dst_bits():
    t = make_time(TimeElements(hour=20, minute=27, day=27, month=2, year=calendar_year_to_tm(2019)))
    summer = dcf77_frame(t, True)
    winter = dcf77_frame(t, False)
    assert (summer[17], summer[18]) == (DcfBit.ONE, DcfBit.ZERO)
    assert (winter[17], winter[18]) == (DcfBit.ZERO, DcfBit.ONE)
    assert summer[19:] == winter[19:]


def test_sunday_is_encoded_as_seven():
    # 1 Jan 2017 was a Sunday
    t = make_time(TimeElements(day=1, month=1, year=calendar_year_to_tm(2017)))
    assert weekday(t) == 1
    assert _decode(dcf77_frame(t, False)[42:45]) == 7


def test_years_before_2000_are_rejected():
    t = make_time(TimeElements(day=1, month=1, year=calendar_year_to_tm(1999)))
    with pytest.raises(ValueError):
        dcf77_frame(t, False)