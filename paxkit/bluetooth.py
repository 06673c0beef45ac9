"""Bluetooth LE scan helpers: name tables, scan timing and packet filtering."""

from __future__ import annotations

import enum

_SLOT_MS = 0.625


class BleAddrType(enum.IntEnum):
    """Kind of address a BLE advertiser uses."""

    PUBLIC = 0
    RANDOM = 1
    RPA_PUBLIC = 2
    RPA_RANDOM = 3


_ADDR_NAMES = {
    BleAddrType.PUBLIC: "BLE_ADDR_TYPE_PUBLIC",
    BleAddrType.RANDOM: "BLE_ADDR_TYPE_RANDOM",
    BleAddrType.RPA_PUBLIC: "BLE_ADDR_TYPE_RPA_PUBLIC",
    BleAddrType.RPA_RANDOM: "BLE_ADDR_TYPE_RPA_RANDOM",
}

_GAP_NAMES = {
    0x01: "Flags",
    0x02: "Incomplete List of 16-bit Service Class UUIDs",
    0x03: "Complete List of 16-bit Service Class UUIDs",
    0x04: "Incomplete List of 32-bit Service Class UUIDs",
    0x05: "Complete List of 32-bit Service Class UUIDs",
    0x06: "Incomplete List of 128-bit Service Class UUIDs",
    0x07: "Complete List of 128-bit Service Class UUIDs",
    0x08: "Shortened Local Name",
    0x09: "Complete Local Name",
    0x0A: "Tx Power Level",
    0x0D: "Class of Device",
    0x0E: "Simple Pairing Hash C/C-192",
    0x0F: "Simple Pairing Randomizer R/R-192",
    0x10: "Device ID/Security Manager TK Value",
    0x11: "Security Manager Out of Band Flags",
    0x12: "Slave Connection Interval Range",
    0x14: "List of 16-bit Service Solicitation UUIDs",
    0x1F: "List of 32-bit Service Solicitation UUIDs",
    0x15: "List of 128-bit Service Solicitation UUIDs",
    0x16: "Service Data - 16-bit UUID",
    0x20: "Service Data - 32-bit UUID",
    0x21: "Service Data - 128-bit UUID",
    0x22: "LE Secure Connections Confirmation Value",
    0x23: "LE Secure Connections Random Value",
    0x24: "URI",
    0x25: "Indoor Positioning",
    0x26: "Transport Discovery Data",
    0x17: "Public Target Address",
    0x18: "Random Target Address",
    0x19: "Appearance",
    0x1A: "Advertising Interval",
    0x1B: "LE Bluetooth Device Address",
    0x1C: "LE Role",
    0x1D: "Simple Pairing Hash C-256",
    0x1E: "Simple Pairing Randomizer R-256",
    0x3D: "3D Information Data",
    0xFF: "Manufacturer Specific Data",
}


def addr_type_name(addr_type: int) -> str:
    """Symbolic name of a BLE address type."""
    try:
        return _ADDR_NAMES[BleAddrType(addr_type)]
    except ValueError:
        return "Unknown addr_t"


def gap_type_name(gap_type: int) -> str:
    """Name of an advertising data (GAP) type."""
    return _GAP_NAMES.get(gap_type, "Unknown type")


def _to_slots(milliseconds: float) -> int:
    slots = int(milliseconds / _SLOT_MS)
    if not 0 <= slots <= 0xFFFF:
        raise ValueError(f"scan time out of range: {milliseconds} ms")
    return slots


def scan_interval(blescantime: float) -> int:
    """Scan interval in 0.625 ms slots for a scan time given in 10 ms units."""
    return _to_slots(blescantime * 10)


def scan_window(window_ms: float) -> int:
    """Scan window in 0.625 ms slots for a window given in milliseconds."""
    return _to_slots(window_ms)


class ScanFilter:
    """Decides which sniffed advertisers are counted.

    ``rssi_limit`` is a negative threshold, 0 disables it. With
    ``vendor_filter`` set, devices using random addresses are ignored.
    """

    def __init__(self, rssi_limit: int = 0, vendor_filter: bool = False) -> None:
        self.rssi_limit = rssi_limit
        self.vendor_filter = vendor_filter

    def accepts(self, rssi: int, addr_type: int) -> bool:
        """True if a device with this signal strength and address type counts."""
        if self.rssi_limit and rssi < self.rssi_limit:
            return False
        if self.vendor_filter and addr_type in (
            BleAddrType.RANDOM,
            BleAddrType.RPA_RANDOM,
        ):
            return False
        return True