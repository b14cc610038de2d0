"""
Token matcher - resolves one design value against a token index.

Each category has a fixed, tiered strategy:
- color: upper-case hex, exact only
- spacing / radii: exact only (widening is done by pre-expanding keys)
- shadow: exact key, then semantic size bucket, then optional speculation
- typography: family-qualified key, then wildcard-family key

The matcher never searches tolerances itself; see matching.tolerance.
"""

from __future__ import annotations

from chuk_mcp_tokens.constants import MatchStrategy, TokenCategory
from chuk_mcp_tokens.core.scoring import path_complexity
from chuk_mcp_tokens.extraction.keys import numeric_key, shadow_key, typography_lookup_keys
from chuk_mcp_tokens.models.config import MatchingConfig
from chuk_mcp_tokens.models.token import MatchResult, ProjectTokenIndex
from chuk_mcp_tokens.models.values import (
    ColorValue,
    ContextHints,
    DesignValue,
    RadiiValue,
    ShadowValue,
    SpacingValue,
    TypographyValue,
)


class TokenMatcher:
    """
    Resolves design values against a built ProjectTokenIndex.

    Matching is pure: the same index and value always give the same result,
    and a miss is a normal result, never an exception.
    """

    def __init__(
        self,
        index: ProjectTokenIndex,
        has_project_theme: bool = False,
        config: MatchingConfig | None = None,
    ):
        """
        Initialize the matcher.

        Args:
            index: Index to resolve against
            has_project_theme: Whether the project has theme infrastructure,
                which allows speculative semantic shadow paths
            config: Matching configuration
        """
        self.index = index
        self.has_project_theme = has_project_theme
        self.config = config or MatchingConfig()

    def match(self, design_value: DesignValue) -> MatchResult:
        """
        Resolve a design value to a token path.

        Args:
            design_value: Value to resolve

        Returns:
            MatchResult (matched=False carries the normalized value back)
        """
        value = design_value.value
        if isinstance(value, ColorValue):
            return self.match_color(value)
        if isinstance(value, SpacingValue | RadiiValue):
            return self.match_number(value)
        if isinstance(value, ShadowValue):
            return self.match_shadow(value, design_value.hints)
        if isinstance(value, TypographyValue):
            return self.match_typography(value, design_value.hints)
        raise TypeError(f"Unsupported design value: {type(value).__name__}")

    def match_color(self, color: ColorValue) -> MatchResult:
        """Exact lookup of the upper-case hex."""
        path = self.index.get(TokenCategory.COLOR, color.hex)
        if path is None:
            return MatchResult.miss(TokenCategory.COLOR, color.hex)
        return MatchResult.hit(TokenCategory.COLOR, path, color.hex)

    def match_number(self, value: SpacingValue | RadiiValue) -> MatchResult:
        """Exact numeric lookup for spacing or radii."""
        category = TokenCategory(value.category)
        key = numeric_key(value.value)
        path = self.index.get(category, key)
        if path is None:
            return MatchResult.miss(category, key)
        return MatchResult.hit(category, path, key)

    def match_shadow(self, shadow: ShadowValue, hints: ContextHints | None = None) -> MatchResult:
        """
        Resolve a shadow by exact key, then by blur bucket.

        The blur radius picks a semantic size (none/sm/md/lg). The 'none'
        bucket never falls back. Otherwise the simplest registered shadow
        path ending in '.<size>' is used, preferring paths that contain a
        hinted keyword; failing that, a project with theme infrastructure
        gets the speculative '<prefix>.<size>' path.
        """
        key = shadow_key(shadow)
        path = self.index.get(TokenCategory.SHADOW, key)
        if path is not None:
            return MatchResult.hit(TokenCategory.SHADOW, path, key)

        size = self.config.bucket_for(shadow.blur)
        if size == self.config.no_shadow_bucket:
            return MatchResult.miss(TokenCategory.SHADOW, key)

        bucket_path = self.find_bucket_path(size, hints)
        if bucket_path is not None:
            return MatchResult.hit(TokenCategory.SHADOW, bucket_path, key, MatchStrategy.BUCKET)

        if self.has_project_theme:
            return MatchResult.hit(
                TokenCategory.SHADOW,
                f"{self.config.speculative_shadow_prefix}.{size}",
                key,
                MatchStrategy.SPECULATIVE,
            )

        return MatchResult.miss(TokenCategory.SHADOW, key)

    def find_bucket_path(self, size: str, hints: ContextHints | None = None) -> str | None:
        """Find the preferred registered shadow path ending in '.<size>'."""
        suffix = f".{size}"
        candidates = [p for p in self.index.paths(TokenCategory.SHADOW) if p.endswith(suffix)]
        if not candidates:
            return None

        keywords = [k.lower() for k in (hints.path_keywords if hints else [])]

        def rank(path: str) -> tuple[bool, int]:
            hinted = any(k in path.lower() for k in keywords)
            return (not hinted, path_complexity(path))

        return min(candidates, key=rank)

    def match_typography(
        self,
        style: TypographyValue,
        hints: ContextHints | None = None,
    ) -> MatchResult:
        """
        Resolve a text style by family-qualified key, then wildcard key.

        The font weight must already be rounded to the nearest hundred.
        """
        family_key, wildcard_key = typography_lookup_keys(
            style, hints.font_family if hints else None
        )

        path = self.index.get(TokenCategory.TYPOGRAPHY, family_key)
        if path is not None:
            return MatchResult.hit(TokenCategory.TYPOGRAPHY, path, family_key, MatchStrategy.FAMILY)

        path = self.index.get(TokenCategory.TYPOGRAPHY, wildcard_key)
        if path is not None:
            return MatchResult.hit(
                TokenCategory.TYPOGRAPHY, path, family_key, MatchStrategy.WILDCARD
            )

        return MatchResult.miss(TokenCategory.TYPOGRAPHY, family_key)
