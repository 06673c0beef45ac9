import pytest
from hypothesis import given
from hypothesis import strategies as st

from paxkit.bluetooth import (
    BleAddrType,
    ScanFilter,
    addr_type_name,
    gap_type_name,
    scan_interval,
    scan_window,
)


@pytest.mark.parametrize(
    "addr_type,name",
    [
        (BleAddrType.PUBLIC, "BLE_ADDR_TYPE_PUBLIC"),
        (BleAddrType.RANDOM, "BLE_ADDR_TYPE_RANDOM"),
        (BleAddrType.RPA_PUBLIC, "BLE_ADDR_TYPE_RPA_PUBLIC"),
        (BleAddrType.RPA_RANDOM, "BLE_ADDR_TYPE_RPA_RANDOM"),
        (42, "Unknown addr_t"),
    ],
)
def test_addr_type_name(addr_type, name):
    assert addr_type_name(addr_type) == name


@pytest.mark.parametrize(
    "gap_type,name",
    [
        (0x01, "Flags"),
        (0x09, "Complete Local Name"),
        (0x3D, "3D Information Data"),
        (0xFF, "Manufacturer Specific Data"),
        (0x0B, "Unknown type"),
    ],
)
def test_gap_type_name(gap_type, name):
    assert gap_type_name(gap_type) == name


@given(st.integers(min_value=1, max_value=255))
def test_scan_interval_slot_granularity(blescantime):
    slots = scan_interval(blescantime)
    assert slots * 0.625 <= blescantime * 10 < (slots + 1) * 0.625


@given(st.integers(min_value=0, max_value=40000))
def test_scan_window_slot_granularity(window_ms):
    slots = scan_window(window_ms)
    assert slots * 0.625 <= window_ms < (slots + 1) * 0.625


def test_scan_times_out_of_range():
    with pytest.raises(ValueError):
        scan_interval(10000)
    with pytest.raises(ValueError):
        scan_window(-5)


def test_rssi_limit():
    flt = ScanFilter(rssi_limit=-80)
    assert flt.accepts(-70, BleAddrType.PUBLIC) is True
    assert flt.accepts(-80, BleAddrType.PUBLIC) is True
    assert flt.accepts(-81, BleAddrType.PUBLIC) is False


def test_zero_limit_disables_rssi_check():
    assert ScanFilter(rssi_limit=0).accepts(-120, BleAddrType.PUBLIC) is True


@pytest.mark.parametrize(
    "addr_type,expected",
    [
        (BleAddrType.PUBLIC, True),
        (BleAddrType.RANDOM, False),
        (BleAddrType.RPA_PUBLIC, True),
        (BleAddrType.RPA_RANDOM, False),
    ],
)
def test_vendor_filter(addr_type, expected):
    assert ScanFilter(vendor_filter=True).accepts(-50, addr_type) is expected
    assert ScanFilter(vendor_filter=False).accepts(-50, addr_type) is True