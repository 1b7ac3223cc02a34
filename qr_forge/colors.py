"""Hex color parsing and normalization."""
from __future__ import annotations

import re
from typing import Tuple

HEX_COLOR_RE = re.compile(r"^#([A-Fa-f0-9]{3}|[A-Fa-f0-9]{4}|[A-Fa-f0-9]{6}|[A-Fa-f0-9]{8})$")

FALLBACK_COLOR = "#000000FF"

RGBA = Tuple[int, int, int, int]


def is_valid_hex_color(color: object) -> bool:
    """Return True for ``#RGB``, ``#RGBA``, ``#RRGGBB`` and ``#RRGGBBAA``."""

    return isinstance(color, str) and HEX_COLOR_RE.match(color) is not None


def normalize_hex_color(color: object) -> str:
    """Expand *color* to upper-case ``#RRGGBBAA``.

    Short forms are expanded by doubling each digit. Forms without an alpha
    channel are fully opaque. Anything that is not a hex color becomes opaque
    black; callers validate user input before getting here.
    """

    if not is_valid_hex_color(color):
        return FALLBACK_COLOR

    digits = str(color)[1:].upper()
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) == 6:
        digits += "FF"
    return f"#{digits}"


def parse_color(value: str) -> RGBA:
    """Return the RGBA tuple Pillow expects for a hex color in any accepted form."""

    value = normalize_hex_color(value)[1:]
    r = int(value[0:2], 16)
    g = int(value[2:4], 16)
    b = int(value[4:6], 16)
    a = int(value[6:8], 16)
    return r, g, b, a


def svg_color(value: str) -> Tuple[str, float]:
    """Split a color into an SVG ``#rrggbb`` fill and an opacity in [0, 1]."""

    normalized = normalize_hex_color(value)
    alpha = int(normalized[7:9], 16) / 255
    return normalized[:7], round(alpha, 3)
