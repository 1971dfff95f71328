from __future__ import annotations

import math
import re

from .models import HSLColor, MatchQuality, RGBColor

_HEX_PATTERN = re.compile(r"#?([0-9A-Fa-f]{2})([0-9A-Fa-f]{2})([0-9A-Fa-f]{2})")

# Upper bounds are exclusive.
EXACT_MATCH_DISTANCE = 10.0
GOOD_MATCH_DISTANCE = 30.0
APPROXIMATE_MATCH_DISTANCE = 60.0


class InvalidColorFormat(ValueError):
    pass


def hex_to_rgb(value: str) -> RGBColor:
    match = _HEX_PATTERN.fullmatch(value) if isinstance(value, str) else None
    if match is None:
        raise InvalidColorFormat(f"invalid hex color: {value!r}")
    return RGBColor(
        r=int(match.group(1), 16),
        g=int(match.group(2), 16),
        b=int(match.group(3), 16),
    )


def rgb_to_hex(rgb: RGBColor) -> str:
    r, g, b = (_clamp_channel(channel) for channel in rgb.as_tuple())
    return f"#{r:02X}{g:02X}{b:02X}"


def rgb_to_hsl(rgb: RGBColor) -> HSLColor:
    r = rgb.r / 255.0
    g = rgb.g / 255.0
    b = rgb.b / 255.0

    high = max(r, g, b)
    low = min(r, g, b)
    lightness = (high + low) / 2.0
    hue = 0.0
    saturation = 0.0

    if high != low:
        delta = high - low
        if lightness > 0.5:
            saturation = delta / (2.0 - high - low)
        else:
            saturation = delta / (high + low)

        if high == r:
            hue = ((g - b) / delta + (6.0 if g < b else 0.0)) / 6.0
        elif high == g:
            hue = ((b - r) / delta + 2.0) / 6.0
        else:
            hue = ((r - g) / delta + 4.0) / 6.0

    return HSLColor(
        h=round_half_up(hue * 360.0),
        s=round_half_up(saturation * 100.0),
        l=round_half_up(lightness * 100.0),
    )


def rgb_distance(first: RGBColor, second: RGBColor) -> float:
    return math.sqrt(
        (second.r - first.r) ** 2
        + (second.g - first.g) ** 2
        + (second.b - first.b) ** 2
    )


def color_distance(hex1: str, hex2: str) -> float:
    return rgb_distance(hex_to_rgb(hex1), hex_to_rgb(hex2))


def match_quality(distance: float) -> MatchQuality:
    if distance < EXACT_MATCH_DISTANCE:
        return "exact"
    if distance < GOOD_MATCH_DISTANCE:
        return "good"
    if distance < APPROXIMATE_MATCH_DISTANCE:
        return "approximate"
    return "poor"


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _clamp_channel(value: float) -> int:
    return max(0, min(255, round_half_up(value)))
