import logging
from dataclasses import dataclass
from enum import Enum

from color_logic import (InvalidColorFormat, HslColor, RgbColor, clamp, hex_to_rgb,
                         hsl_to_rgb, rgb_to_hex, rgb_to_hsl)

logger = logging.getLogger(__name__)

DEFAULT_HEX = "#3B82F6"

RGB_CHANNELS = ("r", "g", "b")
HSL_CHANNELS = ("h", "s", "l")
HSL_LIMITS = {"h": 359, "s": 100, "l": 100}


class Authority(Enum):
    HEX = "hex"
    RGB = "rgb"
    HSL = "hsl"


@dataclass(frozen=True)
class ColorSnapshot:
    hex: str
    rgb: RgbColor
    hsl: HslColor
    authority: Authority


class ColorSyncController:
    """
    Keeps hex, RGB and HSL views of one color in step.

    Each edit marks the edited representation as the authority and derives
    the other two from it in a single pass, then hands an immutable
    ColorSnapshot to every subscribed listener.
    """

    def __init__(self, initial_hex=DEFAULT_HEX):
        rgb = hex_to_rgb(initial_hex)
        self._hex = rgb_to_hex(*rgb)
        self._rgb = rgb
        self._hsl = rgb_to_hsl(*rgb)
        self._authority = Authority.HEX
        self._listeners = []

    def get_snapshot(self):
        return ColorSnapshot(self._hex, self._rgb, self._hsl, self._authority)

    def subscribe(self, listener):
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def edit_hex(self, new_hex):
        """
        Store the typed text verbatim. RGB and HSL only follow once the text
        parses as a full #RRGGBB color, so partial input never clears them.
        """
        self._authority = Authority.HEX
        self._hex = new_hex
        try:
            rgb = hex_to_rgb(new_hex)
        except InvalidColorFormat:
            logger.debug("Incomplete hex %r, keeping %s", new_hex, self._rgb)
        else:
            self._rgb = rgb
            self._hsl = rgb_to_hsl(*rgb)
        return self._publish()

    def edit_rgb(self, channel, value):
        if channel not in RGB_CHANNELS:
            raise ValueError(f"Unknown RGB channel: {channel!r}")

        self._authority = Authority.RGB
        self._rgb = self._rgb._replace(**{channel: clamp(value, 0, 255)})
        self._hex = rgb_to_hex(*self._rgb)
        self._hsl = rgb_to_hsl(*self._rgb)
        return self._publish()

    def edit_hsl(self, channel, value):
        if channel not in HSL_CHANNELS:
            raise ValueError(f"Unknown HSL channel: {channel!r}")

        # A full turn is hue 0; anything past it stops at 359
        if channel == "h" and value == 360:
            value = 0
        value = clamp(value, 0, HSL_LIMITS[channel])

        self._authority = Authority.HSL
        self._hsl = self._hsl._replace(**{channel: value})
        self._rgb = hsl_to_rgb(*self._hsl)
        self._hex = rgb_to_hex(*self._rgb)
        return self._publish()

    def _publish(self):
        snapshot = self.get_snapshot()
        logger.debug("Published %s", snapshot)
        for listener in list(self._listeners):
            listener(snapshot)
        return snapshot
