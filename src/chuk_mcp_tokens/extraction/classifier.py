"""
Category classifier - decides which token category a theme value belongs to.

Numbers are never classified by value alone: a bare 16 could be a spacing
step, a font size, or a z-index, so the property path must say which.
Anything ambiguous is left unclassified; omission is preferred over
misclassification.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from typing import Any

from chuk_mcp_tokens.constants import TokenCategory
from chuk_mcp_tokens.core.colors import is_hex_color
from chuk_mcp_tokens.extraction.keys import parse_font_weight
from chuk_mcp_tokens.models.config import ExtractionConfig
from chuk_mcp_tokens.models.token import ThemeToken
from chuk_mcp_tokens.models.values import (
    ColorValue,
    RadiiValue,
    ShadowValue,
    SpacingValue,
    TokenValue,
    TypographyValue,
)


def is_number(value: Any) -> bool:
    """Check for a finite int/float (bools excluded)."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        return False
    return math.isfinite(value)


def _path_has(path: str, keywords: Iterable[str]) -> bool:
    lower = path.lower()
    return any(keyword.lower() in lower for keyword in keywords)


def _has_any(obj: Mapping[str, Any], *fields: str) -> bool:
    return any(field in obj for field in fields)


def _first_number(obj: Mapping[str, Any], *fields: str) -> int | float:
    """First numeric field present, in order, else 0."""
    for field in fields:
        value = obj.get(field)
        if is_number(value):
            return value
    return 0


def is_typography_shaped(obj: Mapping[str, Any]) -> bool:
    """Check for at least one font field of a valid type."""
    return (
        is_number(obj.get("fontSize"))
        or isinstance(obj.get("fontFamily"), str)
        or is_number(obj.get("lineHeight"))
    )


def is_shadow_shaped(obj: Mapping[str, Any]) -> bool:
    """Check for offset fields, or blur together with a color."""
    has_offsets = _has_any(obj, "offsetX", "x") and _has_any(obj, "offsetY", "y")
    has_blur_and_color = _has_any(obj, "blur", "radius") and "color" in obj
    return has_offsets or has_blur_and_color


def classify(path: str, value: Any, config: ExtractionConfig) -> TokenCategory | None:
    """
    Decide the token category of a theme value.

    Rules, in order:
    1. Hex color string -> color
    2. Number with a spacing keyword in the path -> spacing,
       with a radii keyword -> radii, otherwise unclassified
    3. Mapping with a font field -> typography; shadow-shaped mapping under
       a shadow/elevation path -> shadow
    4. Anything else -> unclassified

    Args:
        path: Property path of the value
        value: Value found at that path
        config: Keyword configuration for this run

    Returns:
        The category, or None when the value is ambiguous or unsupported
    """
    if is_hex_color(value):
        return TokenCategory.COLOR

    if is_number(value):
        if _path_has(path, config.spacing_keywords):
            return TokenCategory.SPACING
        if _path_has(path, config.radii_keywords):
            return TokenCategory.RADII
        return None

    if isinstance(value, Mapping):
        if is_typography_shaped(value):
            return TokenCategory.TYPOGRAPHY
        if is_shadow_shaped(value) and _path_has(path, config.shadow_keywords):
            return TokenCategory.SHADOW

    return None


def to_token_value(category: TokenCategory, value: Any) -> TokenValue:
    """Convert a classified raw value into its typed variant."""
    if category == TokenCategory.COLOR:
        return ColorValue(hex=value)
    if category == TokenCategory.SPACING:
        return SpacingValue(value=value)
    if category == TokenCategory.RADII:
        return RadiiValue(value=value)
    if category == TokenCategory.SHADOW:
        color = value.get("color")
        return ShadowValue(
            offset_x=_first_number(value, "offsetX", "x"),
            offset_y=_first_number(value, "offsetY", "y"),
            blur=_first_number(value, "blur", "radius"),
            spread=_first_number(value, "spread"),
            color=color if isinstance(color, str) else None,
        )
    family = value.get("fontFamily")
    return TypographyValue(
        font_family=family if isinstance(family, str) and family else None,
        font_size=value["fontSize"] if is_number(value.get("fontSize")) else None,
        font_weight=parse_font_weight(value.get("fontWeight")),
        line_height=value["lineHeight"] if is_number(value.get("lineHeight")) else None,
    )


def to_theme_token(path: str, value: Any, config: ExtractionConfig) -> ThemeToken | None:
    """
    Classify a raw theme value and convert it into a typed token.

    This is the only place raw theme values are inspected; everything after
    it works on ThemeToken.

    Returns:
        The token, or None when the value is unclassified
    """
    category = classify(path, value, config)
    if category is None:
        return None
    return ThemeToken(
        path=path,
        category=category,
        raw_value=value,
        value=to_token_value(category, value),
    )
