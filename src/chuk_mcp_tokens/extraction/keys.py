"""
Composite key builder - deterministic lookup keys per category.

Keys are built the same way at registration time (from theme tokens) and
at lookup time (from design values), so both sides must go through here.
"""

from __future__ import annotations

import math
from typing import Any

from chuk_mcp_tokens.constants import (
    BOLD_SUFFIXES,
    BOLD_WEIGHTS,
    DEFAULT_FONT_WEIGHT,
    NAMED_FONT_WEIGHTS,
    REGULAR_SUFFIXES,
    REGULAR_WEIGHTS,
)
from chuk_mcp_tokens.core.paths import ends_with_segment
from chuk_mcp_tokens.models.token import IndexKey, ThemeToken
from chuk_mcp_tokens.models.values import (
    ColorValue,
    RadiiValue,
    ShadowValue,
    SpacingValue,
    TypographyValue,
)

WILDCARD_FAMILY = "*"


def format_number(value: float | int | None) -> str:
    """Format a number for a composite key (16.0 -> '16', None -> '0')."""
    if value is None:
        return "0"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def numeric_key(value: float | int) -> int | float:
    """Normalize a spacing/radius number into its index key."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def normalize_weight(weight: float | int) -> int:
    """Round a font weight to the nearest hundred (half rounds up)."""
    return int(math.floor(weight / 100 + 0.5)) * 100


def parse_font_weight(value: Any) -> int | None:
    """
    Parse an explicit fontWeight (700, '700', 'bold') into a normalized weight.

    Returns None for anything unrecognized.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        return normalize_weight(value)
    if isinstance(value, str):
        text = value.strip().lower().replace("-", "").replace(" ", "")
        if text in NAMED_FONT_WEIGHTS:
            return NAMED_FONT_WEIGHTS[text]
        try:
            return normalize_weight(float(text))
        except ValueError:
            return None
    return None


def weight_from_family(family: str | None) -> int:
    """Infer a weight from a font family name (e.g. 'Inter-SemiBold' -> 600)."""
    if not family:
        return DEFAULT_FONT_WEIGHT
    name = family.lower().replace("-", "").replace(" ", "")
    if "semibold" in name:
        return 600
    if "bold" in name:
        return 700
    if "medium" in name:
        return 500
    return DEFAULT_FONT_WEIGHT


def shadow_key(shadow: ShadowValue) -> str:
    """Build the 'offsetX,offsetY,blur,spread' key of a shadow."""
    return ",".join(
        format_number(v) for v in (shadow.offset_x, shadow.offset_y, shadow.blur, shadow.spread)
    )


def typography_key(family: str, size: Any, weight: Any, line_height: Any) -> str:
    """Build one 'family-size-weight-lineHeight' key."""
    parts = (format_number(v or 0) for v in (size, weight, line_height))
    return "-".join((family, *parts))


def registration_weights(path: str, style: TypographyValue) -> tuple[int, ...]:
    """
    Weights a typography token is registered under.

    Variant paths (.bold/.semibold, .regular/.medium) cover their pair of
    weights. Other tokens cover their inferred weight plus one neighbour,
    so small weight differences between sources still resolve.
    """
    if ends_with_segment(path, BOLD_SUFFIXES):
        return BOLD_WEIGHTS
    if ends_with_segment(path, REGULAR_SUFFIXES):
        return REGULAR_WEIGHTS

    if style.font_weight is not None:
        weight = normalize_weight(style.font_weight)
    else:
        weight = weight_from_family(style.font_family)
    adjacent = weight - 100 if weight >= 600 else weight + 100
    return (weight, adjacent)


def typography_keys(path: str, style: TypographyValue) -> list[str]:
    """
    Build every registration key for a typography token.

    Each weight gets a wildcard-family key and, when the token names a
    family, a family-qualified key.
    """
    keys: list[str] = []
    for weight in registration_weights(path, style):
        keys.append(typography_key(WILDCARD_FAMILY, style.font_size, weight, style.line_height))
        if style.font_family:
            keys.append(
                typography_key(style.font_family, style.font_size, weight, style.line_height)
            )
    return keys


def typography_lookup_keys(style: TypographyValue, family: str | None = None) -> tuple[str, str]:
    """
    Build the (family-qualified, wildcard) lookup keys for a design value.

    The weight is used as given; callers normalize it beforehand.
    """
    family = style.font_family or family or ""
    return (
        typography_key(family, style.font_size, style.font_weight, style.line_height),
        typography_key(WILDCARD_FAMILY, style.font_size, style.font_weight, style.line_height),
    )


def index_keys(token: ThemeToken) -> list[IndexKey]:
    """Get every key a theme token registers under."""
    value = token.value
    if isinstance(value, ColorValue):
        return [value.hex]
    if isinstance(value, SpacingValue | RadiiValue):
        return [numeric_key(value.value)]
    if isinstance(value, ShadowValue):
        return [shadow_key(value)]
    if isinstance(value, TypographyValue):
        return list(typography_keys(token.path, value))
    raise TypeError(f"Unsupported token value for {token.category}: {type(value).__name__}")

