import math
import re
from typing import NamedTuple

HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")


class ColorSyncError(Exception):
    """Base class for color sync errors."""


class InvalidColorFormat(ColorSyncError, ValueError):
    """
    Raised when a string is not a complete #RRGGBB color.
    """
    def __init__(self, value):
        super().__init__(f"Invalid hex color: {value!r}")
        self.value = value


class RgbColor(NamedTuple):
    r: int
    g: int
    b: int


class HslColor(NamedTuple):
    h: int
    s: int
    l: int


def round_half_up(value):
    # round() would send x.5 to the even neighbour
    return int(math.floor(value + 0.5))


def clamp(value, low, high):
    return max(low, min(high, int(value)))


def hex_to_rgb(hex_str):
    """
    Parse '#RRGGBB' (the '#' is optional, digits are case-insensitive).
    Raises InvalidColorFormat for anything else.
    """
    if not isinstance(hex_str, str):
        raise InvalidColorFormat(hex_str)
    match = HEX_PATTERN.match(hex_str)
    if not match:
        raise InvalidColorFormat(hex_str)
    return RgbColor(*(int(group, 16) for group in match.groups()))


def rgb_to_hex(r, g, b):
    return f"#{r:02X}{g:02X}{b:02X}"


def rgb_to_hsl(r, g, b):
    """
    Convert RGB (0-255) to HSL (0-360, 0-100, 0-100).
    """
    r = r / 255.0
    g = g / 255.0
    b = b / 255.0

    c_max = max(r, g, b)
    c_min = min(r, g, b)
    l = (c_max + c_min) / 2
    h = s = 0.0

    if c_max != c_min:
        d = c_max - c_min
        s = d / (2 - c_max - c_min) if l > 0.5 else d / (c_max + c_min)

        # Red wins ties, then green
        if c_max == r:
            h = ((g - b) / d + (6 if g < b else 0)) / 6
        elif c_max == g:
            h = ((b - r) / d + 2) / 6
        else:
            h = ((r - g) / d + 4) / 6

    return HslColor(round_half_up(h * 360) % 360, round_half_up(s * 100), round_half_up(l * 100))


def _hue_to_rgb(p, q, t):
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h, s, l):
    """
    Convert HSL (0-360, 0-100, 0-100) to RGB (0-255).
    """
    h = (h % 360) / 360.0
    s = s / 100.0
    l = l / 100.0

    if s == 0:
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_rgb(p, q, h + 1 / 3)
        g = _hue_to_rgb(p, q, h)
        b = _hue_to_rgb(p, q, h - 1 / 3)

    return RgbColor(round_half_up(r * 255), round_half_up(g * 255), round_half_up(b * 255))


def format_rgb(rgb):
    return f"rgb({rgb[0]}, {rgb[1]}, {rgb[2]})"


def format_hsl(hsl):
    return f"hsl({hsl[0]}, {hsl[1]}%, {hsl[2]}%)"
