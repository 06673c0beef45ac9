# paxkit

Helpers for a small sensor node that counts nearby Wi-Fi and Bluetooth
devices: time keeping, clock telegrams, hashing, LED colours, matrix fonts
and configuration storage. The package has no dependencies outside the
standard library.

## Modules

- `paxkit.timelib` converts between epoch seconds and calendar fields
  (`break_time`, `make_time`, `TimeElements`, whose `year` is an offset
  from 1970). It has per-field accessors such as `hour`, `minute`,
  `weekday` and `year`, and helpers such as `previous_midnight` and
  `next_sunday`. `Clock` is a software clock driven by a 32-bit
  microsecond counter you pass in as a callable. It can be set with
  `set_time` or `set_time_parts`, advanced with `sync_to_pps`, and it
  polls an optional provider installed with `set_sync_provider` once the
  sync interval has run out. `status()` reports a `TimeStatus`.
- `paxkit.datestrings` gives month and weekday names: `month_str`,
  `month_short_str`, `day_str` and `day_short_str` (weekday 1 is Sunday,
  index 0 gives an empty string or `"Err"`).
- `paxkit.rokkit` is a fast 32-bit hash for MAC addresses and other short
  byte strings: `rokkit(data)`. Empty input hashes to 0.
- `paxkit.dcf77` builds the 60 pulses (`DcfBit`) of a DCF77 minute for a
  local time with `dcf77_frame(local_time, is_dst)`. It also provides the
  `bcd_bits` and `parity_bit` helpers.
- `paxkit.if482` builds the 17 character IF482 serial telegram with
  `if482_frame(local_time, status)`. The monitoring character comes from
  `monitoring_char`.
- `paxkit.bluetooth` names BLE address types (`addr_type_name`) and
  advertising data types (`gap_type_name`). It converts scan interval and
  window times into 0.625 ms slots (`scan_interval`, `scan_window`). Its
  `ScanFilter` drops devices below an RSSI limit and, with the vendor
  filter on, devices that use random addresses.
- `paxkit.uptime.UptimeCounter` extends a wrapping 32-bit millisecond
  counter into a 64-bit uptime.
- `paxkit.led` converts HSL to RGB (`hsl_to_rgb`, `hue_to_rgb`). Its
  `BlinkController` keeps the status LED lit for a timed blink and
  otherwise off. `step(now)` returns the new state only when it changes.
- `paxkit.fonts` defines `FontInfo` and `FontCharInfo` and the Digital-7
  18pt digit font `DIGITAL7_18PT`. `paxkit.fonts_extra` adds
  `ARIAL_NARROW_17PT`, `GILL_SANS_MT_CONDENSED_18PT` and
  `GILL_SANS_MT_CONDENSED_16PT`. The fonts cover the characters `-` to `9`.
- `paxkit.matrix.MatrixCanvas` is a one-bit frame buffer. It draws glyphs
  with `draw_char`, and `draw_number` draws a string with an optional dot.
  `rows()` returns the buffer.
- `paxkit.config` has the `Config` dataclass and `default_config` for the
  factory settings. `ConfigStore` keeps a configuration in a JSON file;
  `load` merges the stored values over the defaults and writes back any
  that are missing or invalid.
- `paxkit.battery` averages millivolt samples through a voltage divider
  (`average_voltage`). `battery_sufficient` reports whether there is
  either no battery or enough charge.

## Example

```python
from paxkit.timelib import TimeStatus, break_time, make_time
from paxkit.if482 import if482_frame
from paxkit.rokkit import rokkit

tm = break_time(1_000_000_000)
assert make_time(tm) == 1_000_000_000

telegram = if482_frame(1_000_000_000, TimeStatus.SET)
digest = rokkit(b"\x01\x02\x03\x04\x05\x06")
```

## What it does not do

paxkit only computes. It does not scan Wi-Fi or Bluetooth and does not
send LoRa messages. It does not drive GPIO pins, LEDs, OLED or LED matrix
displays, serial ports or ADCs. Callers feed it readings and timestamps,
then pass its frames, colours and buffers to their own hardware layer.
There is no command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```