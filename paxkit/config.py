"""Persistent device configuration kept as a JSON file of named values."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Union

log = logging.getLogger(__name__)

_U8 = (0, 0xFF)
_I16 = (-0x8000, 0x7FFF)


@dataclass(frozen=True)
class Config:
    """Runtime settings of the counter device."""

    version: str
    lorasf: int
    sendcycle: int
    wifichancycle: int
    blescantime: int
    rgblum: int
    txpower: int = 15  # lora tx power 2-15
    adrmode: int = 1
    screensaver: int = 0
    screenon: int = 1
    countermode: int = 0  # 0=cyclic, 1=cumulative, 2=cyclic confirmed
    rssilimit: int = 0  # negative threshold, 0 = off
    blescan: int = 0
    wifiant: int = 0  # 0=internal, 1=external
    vendorfilter: int = 1
    monitormode: int = 0
    runmode: int = 0  # 0=normal, 1=update
    payloadmask: int = 0xFF
    bsecstate: bytes = b""


# field name -> (storage key, allowed range)
_NUMERIC_KEYS: dict[str, tuple[str, tuple[int, int]]] = {
    "lorasf": ("lorasf", _U8),
    "txpower": ("txpower", _U8),
    "adrmode": ("adrmode", _U8),
    "screensaver": ("screensaver", _U8),
    "screenon": ("screenon", _U8),
    "countermode": ("countermode", _U8),
    "sendcycle": ("sendcycle", _U8),
    "wifichancycle": ("wifichancycle", _U8),
    "blescantime": ("blescantime", _U8),
    "blescan": ("blescanmode", _U8),
    "wifiant": ("wifiant", _U8),
    "vendorfilter": ("vendorfilter", _U8),
    "rgblum": ("rgblum", _U8),
    "payloadmask": ("payloadmask", _U8),
    "monitormode": ("monitormode", _U8),
    "runmode": ("runmode", _U8),
    "rssilimit": ("rssilimit", _I16),
}

_VERSION_KEY = "version"
_BSEC_KEY = "bsecstate"


def default_config(
    version: str,
    lorasf: int,
    sendcycle: int,
    wifichancycle: int,
    blescaninterval: int,
    rgblum: int,
) -> Config:
    """Factory settings; the BLE scan time is the scan interval in 10 ms units."""
    return Config(
        version=version,
        lorasf=lorasf,
        sendcycle=sendcycle,
        wifichancycle=wifichancycle,
        blescantime=blescaninterval // 10,
        rgblum=rgblum,
    )


def _in_range(value: Any, bounds: tuple[int, int]) -> bool:
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and bounds[0] <= value <= bounds[1]
    )


def _encode(config: Config) -> dict[str, Any]:
    data: dict[str, Any] = {
        _VERSION_KEY: config.version,
        _BSEC_KEY: bytes(config.bsecstate).hex(),
    }
    for name, (key, bounds) in _NUMERIC_KEYS.items():
        value = getattr(config, name)
        if not _in_range(value, bounds):
            raise ValueError(f"{name} out of range {bounds}: {value!r}")
        data[key] = value
    return data


class ConfigStore:
    """Loads and saves a :class:`Config` to a JSON file at ``path``."""

    def __init__(self, path: Union[str, os.PathLike], defaults: Config) -> None:
        self.path = Path(path)
        self.defaults = defaults

    def _read(self) -> dict[str, Any]:
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError("configuration file does not hold an object")
        return data

    def _write(self, data: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self.path.parent, prefix=self.path.name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh, indent=2, sort_keys=True)
            os.replace(tmp, self.path)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise

    def save(self, config: Config) -> None:
        """Store ``config``; values out of range raise ValueError."""
        data = _encode(config)
        try:
            stored = self._read()
        except ValueError:
            stored = {}
        if stored == data:
            return
        self._write(data)
        log.info("settings stored")

    def erase(self) -> None:
        """Remove every stored value."""
        self._write({})
        log.info("settings cleared")

    def load(self) -> Config:
        """Return the stored configuration merged over the defaults.

        A missing version erases stored settings; a different version keeps
        them and records the current version. Missing or invalid values
        take their defaults, which are then written back.
        """
        config = self.defaults
        try:
            data = self._read()
        except (OSError, ValueError) as exc:
            log.warning("cannot read settings (%s), storing defaults", exc)
            self.save(config)
            return config

        stored_version = data.get(_VERSION_KEY)
        if not isinstance(stored_version, str):
            log.info("new version %s, deleting stored settings", config.version)
            self.erase()
            self.save(config)
            return config

        needs_save = stored_version != config.version
        if needs_save:
            log.info("migrating settings to version %s", config.version)

        updates: dict[str, Any] = {}
        blob = data.get(_BSEC_KEY)
        if isinstance(blob, str):
            try:
                updates["bsecstate"] = bytes.fromhex(blob)
            except ValueError:
                needs_save = True
        else:
            needs_save = True

        for name, (key, bounds) in _NUMERIC_KEYS.items():
            value = data.get(key)
            if _in_range(value, bounds):
                updates[name] = value
            else:
                log.info("%s set to default %s", name, getattr(config, name))
                needs_save = True

        config = replace(config, **updates)
        if needs_save:
            self.save(config)
        return config


__all__ = ["Config", "ConfigStore", "default_config"]
_ = fields  # dataclass helpers kept importable for callers inspecting Config