"""RGB colour conversion and the blink state machine of the status LED."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

_MASK = 0xFFFFFFFF


@dataclass(frozen=True)
class RGBColor:
    """An 8-bit per channel colour."""

    r: int = 0
    g: int = 0
    b: int = 0


class LedState(enum.Enum):
    """Whether the LED is lit."""

    OFF = enum.auto()
    ON = enum.auto()


def calc_color(p: float, q: float, t: float) -> float:
    """Helper of the HSL to RGB conversion for one channel."""
    if t < 0.0:
        t += 1.0
    if t > 1.0:
        t -= 1.0
    if t < 1.0 / 6.0:
        return p + (q - p) * 6.0 * t
    if t < 0.5:
        return q
    if t < 2.0 / 3.0:
        return p + (q - p) * (2.0 / 3.0 - t) * 6.0
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> RGBColor:
    """Convert hue, saturation and lightness (0.0-1.0) into an RGB colour."""
    if s == 0.0 or l == 0.0:
        r = g = b = l  # achromatic or black
    else:
        q = l * (1.0 + s) if l < 0.5 else l + s - l * s
        p = 2.0 * l - q
        r = calc_color(p, q, h + 1.0 / 3.0)
        g = calc_color(p, q, h)
        b = calc_color(p, q, h - 1.0 / 3.0)
    return RGBColor(int(r * 255.0), int(g * 255.0), int(b * 255.0))


def hue_to_rgb(hue: Optional[int], luminosity: int) -> RGBColor:
    """Colour for a hue in degrees at ``luminosity`` percent; None means off."""
    if hue is None:
        return RGBColor(0, 0, 0)
    return hsl_to_rgb(hue / 360.0, 1.0, 0.005 * luminosity)


class BlinkController:
    """Drives the LED: a timed blink, otherwise off.

    Times are 32-bit millisecond readings; a blink started at time 0 is
    ignored, as in the firmware loop.
    """

    def __init__(self) -> None:
        self.state = LedState.OFF
        self.color: Optional[int] = None
        self._previous = LedState.ON  # forces the LED off on the first step
        self._started = 0
        self._duration = 0

    def blink(self, color: Optional[int], duration: int, now: int) -> None:
        """Light the LED in ``color`` (a hue) for ``duration`` milliseconds."""
        self.color = color
        self._duration = duration
        self._started = now & _MASK
        self.state = LedState.ON

    def step(self, now: int) -> Optional[tuple[LedState, Optional[int]]]:
        """Advance to ``now``; return (state, hue) if the LED must change, else None."""
        if self._started and self._duration:
            if ((now - self._started) & _MASK) >= self._duration:
                self.state = LedState.OFF
                self._started = 0
                self._duration = 0
                self.color = None
            else:
                self.state = LedState.ON
        else:
            self.color = None
            self.state = LedState.OFF

        if self.state == self._previous:
            return None
        self._previous = self.state
        if self.state is LedState.ON:
            return LedState.ON, self.color
        return LedState.OFF, None