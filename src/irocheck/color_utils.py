"""Colour parsing and colour space conversions for irocheck.

Colours travel between modules as canonical hex strings (``#`` followed by
six uppercase hex digits). RGB values are 8-bit integers; HSL values use
degrees for hue and percent for saturation and lightness, so a lightness
search can step through whole percentage points.
"""

import math
import re

import colour
import numpy as np

from .models import HSL, RGB

__all__ = [
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "normalize_hex",
    "parse_color",
]

_HEX_PATTERN = re.compile(r"#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})", re.IGNORECASE)


def hex_to_rgb(hex_str: str) -> RGB | None:
    """Parse ``#RRGGBB`` or ``RRGGBB`` (any case).

    Shorthand (``#FFF``), surrounding whitespace and every other shape are
    rejected with ``None``.
    """
    if not isinstance(hex_str, str):
        return None

    match = _HEX_PATTERN.fullmatch(hex_str)
    if not match:
        return None

    r, g, b = (int(group, 16) for group in match.groups())
    return RGB(r, g, b)


def _clamp_channel(value: float) -> int:
    return max(0, min(255, int(value)))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Format 8-bit channels as canonical ``#RRGGBB``."""
    return "#{:02X}{:02X}{:02X}".format(
        _clamp_channel(r), _clamp_channel(g), _clamp_channel(b)
    )


def normalize_hex(hex_str: str) -> str | None:
    """Return the canonical form of a hex colour, or ``None`` if malformed."""
    rgb = hex_to_rgb(hex_str)
    if rgb is None:
        return None
    return rgb_to_hex(*rgb)


def rgb_to_hsl(r: int, g: int, b: int) -> HSL:
    """Convert 8-bit RGB to HSL.

    Achromatic colours (all channels equal) get hue and saturation 0.
    """
    r, g, b = r / 255.0, g / 255.0, b / 255.0
    high = max(r, g, b)
    low = min(r, g, b)
    lightness = (high + low) / 2.0

    if high == low:
        return HSL(0.0, 0.0, lightness * 100.0)

    d = high - low
    s = d / (2.0 - high - low) if lightness > 0.5 else d / (high + low)

    # Sector arithmetic on the largest channel. Lightness searches round each
    # step to 8 bits, so a last-bit hue difference can move a channel.
    if high == r:
        h = (g - b) / d + (6.0 if g < b else 0.0)
    elif high == g:
        h = (b - r) / d + 2.0
    else:
        h = (r - g) / d + 4.0
    h /= 6.0

    return HSL(h * 360.0, s * 100.0, lightness * 100.0)


def _round_channel(value: float) -> int:
    # Half-up rounding; Python's round() would send 127.5 to 128 but 126.5 to 126.
    return max(0, min(255, int(math.floor(value * 255.0 + 0.5))))


def hsl_to_rgb(h: float, s: float, lightness: float) -> RGB:
    """Convert HSL back to 8-bit RGB, rounding each channel to the nearest integer.

    The trip through integers is lossy: ``rgb_to_hsl(*hsl_to_rgb(h, s, l))``
    lands within about one lightness unit of the input.
    """
    hsl = np.array([h / 360.0, s / 100.0, lightness / 100.0])
    r, g, b = colour.HSL_to_RGB(hsl)
    return RGB(_round_channel(r), _round_channel(g), _round_channel(b))


def parse_color(color_str: str) -> str:
    """Parse user input into a canonical hex colour."""
    normalized = normalize_hex(color_str.strip())
    if normalized is None:
        raise ValueError(
            f"Invalid color format: '{color_str}'. Supported formats: #RRGGBB, RRGGBB"
        )
    return normalized
