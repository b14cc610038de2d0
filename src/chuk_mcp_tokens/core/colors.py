"""
Color primitives - hex normalization and CIE76 Delta-E distance.

Index keys are always upper-case #RRGGBB or #RRGGBBAA. Distance is only
used to suggest the nearest theme color for values that found no exact
match; matching itself never goes fuzzy on colors.
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterable

HEX_COLOR = re.compile(r"^#(?:[0-9A-Fa-f]{3}|[0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})$")
_RGB = re.compile(
    r"^rgba?\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*(?:,\s*([\d.]+%?)\s*)?\)$",
    re.IGNORECASE,
)

Lab = tuple[float, float, float]

# D65 reference white
_XN, _YN, _ZN = 0.95047, 1.0, 1.08883


def is_hex_color(value: object) -> bool:
    """Check if a value is a '#'-prefixed 3, 6 or 8 digit hex color."""
    return isinstance(value, str) and bool(HEX_COLOR.match(value))


def normalize_hex(value: str) -> str:
    """
    Normalize a hex color to upper-case #RRGGBB or #RRGGBBAA.

    Shorthand #RGB is expanded. Raises ValueError for anything else.
    """
    if not is_hex_color(value):
        raise ValueError(f"Invalid hex color: {value}")
    digits = value[1:]
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return f"#{digits.upper()}"


def normalize_color(value: str) -> str:
    """
    Normalize a hex or rgb()/rgba() color string to upper-case hex.

    An rgba() alpha below 1 is kept as the AA byte.
    """
    value = value.strip()
    if value.startswith("#"):
        return normalize_hex(value)

    match = _RGB.match(value)
    if not match:
        raise ValueError(f"Unsupported color format: {value}")

    channels = [int(match.group(i)) for i in (1, 2, 3)]
    if any(c > 255 for c in channels):
        raise ValueError(f"Color channel out of range: {value}")

    hex_value = "#" + "".join(f"{c:02X}" for c in channels)
    alpha = match.group(4)
    if alpha is not None:
        a = float(alpha[:-1]) / 100 if alpha.endswith("%") else float(alpha)
        if a < 1:
            hex_value += f"{round(max(a, 0.0) * 255):02X}"
    return hex_value


def to_rgb(color: str) -> tuple[int, int, int]:
    """Parse a hex/rgb color into 0-255 channels (alpha ignored)."""
    hex_value = normalize_color(color)
    return (
        int(hex_value[1:3], 16),
        int(hex_value[3:5], 16),
        int(hex_value[5:7], 16),
    )


def _srgb_to_linear(c: int) -> float:
    v = c / 255
    return v / 12.92 if v <= 0.04045 else ((v + 0.055) / 1.055) ** 2.4


def _f(t: float) -> float:
    return math.cbrt(t) if t > 0.008856 else 7.787 * t + 16 / 116


def color_to_lab(color: str) -> Lab:
    """Convert a hex/rgb color to CIE L*a*b* (D65)."""
    r, g, b = (_srgb_to_linear(c) for c in to_rgb(color))
    x = r * 0.4124564 + g * 0.3575761 + b * 0.1804375
    y = r * 0.2126729 + g * 0.7151522 + b * 0.0721750
    z = r * 0.0193339 + g * 0.1191920 + b * 0.9503041
    fx, fy, fz = _f(x / _XN), _f(y / _YN), _f(z / _ZN)
    return (116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz))


def lab_distance(a: Lab, b: Lab) -> float:
    """CIE76 Delta-E between two Lab colors."""
    return math.sqrt(sum((p - q) ** 2 for p, q in zip(a, b, strict=True)))


def find_closest_color(
    color: str,
    candidates: Iterable[tuple[str, str]],
    threshold: float = 8.0,
) -> tuple[str, float] | None:
    """
    Find the closest candidate color within a Delta-E threshold.

    Args:
        color: Color to look up
        candidates: (hex, path) pairs, in priority order
        threshold: Maximum Delta-E for a suggestion

    Returns:
        (path, distance) of the closest candidate, or None
    """
    try:
        target = color_to_lab(color)
    except ValueError:
        return None

    best: tuple[str, float] | None = None
    for candidate_hex, path in candidates:
        try:
            distance = lab_distance(target, color_to_lab(candidate_hex))
        except ValueError:
            continue
        if distance <= threshold and (best is None or distance < best[1]):
            best = (path, distance)
    return best
