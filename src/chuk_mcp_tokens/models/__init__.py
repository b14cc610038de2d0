"""
Pydantic models for the token system.

This module provides:
- Typed token values: ColorValue, SpacingValue, RadiiValue, ShadowValue, TypographyValue
- DesignValue: Incoming design value with context hints
- ThemeToken: Token extracted from a theme source
- ProjectTokenIndex: Category maps of normalized key -> token path
- MatchResult: Outcome of resolving a design value
- ExtractionConfig / MatchingConfig / TokensConfig: Explicit run configuration
"""

from chuk_mcp_tokens.models.config import (
    ExtractionConfig,
    MatchingConfig,
    ShadowBucket,
    TokensConfig,
)
from chuk_mcp_tokens.models.token import IndexKey, MatchResult, ProjectTokenIndex, ThemeToken
from chuk_mcp_tokens.models.values import (
    ColorValue,
    ContextHints,
    DesignValue,
    RadiiValue,
    ShadowValue,
    SpacingValue,
    TokenValue,
    TypographyValue,
    category_of,
)

__all__ = [
    "ColorValue",
    "ContextHints",
    "DesignValue",
    "ExtractionConfig",
    "IndexKey",
    "MatchResult",
    "MatchingConfig",
    "ProjectTokenIndex",
    "RadiiValue",
    "ShadowBucket",
    "ShadowValue",
    "SpacingValue",
    "ThemeToken",
    "TokenValue",
    "TokensConfig",
    "TypographyValue",
    "category_of",
]
