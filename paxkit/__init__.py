"""Time keeping, DCF77/IF482 telegrams, hashing, BLE scan, LED, matrix font and configuration helpers for a sensor node."""

__version__ = "0.1.0"