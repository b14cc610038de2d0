"""
Configuration models for extraction and matching.

Configuration is passed explicitly into every call rather than read from
module state, so runs for different projects never share settings.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_tokens.constants import (
    DEFAULT_PATH_DENYLIST,
    DEFAULT_RADII_KEYWORDS,
    DEFAULT_SHADOW_BUCKETS,
    DEFAULT_SHADOW_KEYWORDS,
    DEFAULT_SPACING_KEYWORDS,
    THEME_ROOT,
    SchemaVersion,
)


class ExtractionConfig(BaseModel):
    """Settings for classifying and indexing a theme tree."""

    spacing_keywords: tuple[str, ...] = Field(
        default=DEFAULT_SPACING_KEYWORDS,
        description="Path keywords that mark a number as spacing",
    )
    radii_keywords: tuple[str, ...] = Field(
        default=DEFAULT_RADII_KEYWORDS,
        description="Path keywords that mark a number as a corner radius",
    )
    shadow_keywords: tuple[str, ...] = Field(
        default=DEFAULT_SHADOW_KEYWORDS,
        description="Path keywords required for shadow-shaped objects",
    )
    path_denylist: tuple[str, ...] = Field(
        default=DEFAULT_PATH_DENYLIST,
        description="Wrapper segments stripped by the path simplifier",
    )
    root_path: str = Field(default=THEME_ROOT, description="Path of the tree root")
    simplify_paths: bool = Field(
        default=True,
        description="Register canonical theme.* paths instead of raw paths",
    )
    deprioritize_overlays: bool = Field(
        default=False,
        description="Penalize overlay/opacity/Preset paths when scoring",
    )

    model_config = {"frozen": True}


class ShadowBucket(BaseModel):
    """A semantic shadow size and the largest blur radius it covers."""

    size: str
    max_blur: float | None = Field(
        default=None,
        description="Inclusive upper bound; None means unbounded",
    )

    model_config = {"frozen": True}

    def contains(self, blur: float) -> bool:
        """Check if a blur radius falls in this bucket."""
        return self.max_blur is None or blur <= self.max_blur


def _default_buckets() -> tuple[ShadowBucket, ...]:
    return tuple(
        ShadowBucket(size=size, max_blur=None if limit == float("inf") else limit)
        for limit, size in DEFAULT_SHADOW_BUCKETS
    )


class MatchingConfig(BaseModel):
    """Settings for resolving design values against an index."""

    shadow_buckets: tuple[ShadowBucket, ...] = Field(
        default_factory=_default_buckets,
        description="Ordered blur buckets; the first containing bucket wins",
    )
    no_shadow_bucket: str = Field(
        default="none",
        description="Bucket that never falls back or speculates",
    )
    speculative_shadow_prefix: str = Field(
        default="theme.shadows",
        description="Prefix for assumed semantic shadow tokens",
    )
    line_height_offsets: tuple[int, ...] = Field(default=(1, -1, 2, -2))
    size_offsets: tuple[int, ...] = Field(default=(1, -1))
    weight_offsets: tuple[int, ...] = Field(default=(100, -100))
    numeric_tolerance: int = Field(
        default=0,
        ge=0,
        description="Pre-expand spacing/radii keys by this many pixels",
    )
    color_suggestion_threshold: float = Field(
        default=8.0,
        ge=0,
        description="Max Delta-E for nearest-color suggestions on unmapped colors",
    )

    model_config = {"frozen": True}

    @field_validator("shadow_buckets")
    @classmethod
    def _last_bucket_unbounded(cls, buckets: tuple[ShadowBucket, ...]) -> tuple[ShadowBucket, ...]:
        if not buckets:
            raise ValueError("At least one shadow bucket is required")
        if buckets[-1].max_blur is not None:
            raise ValueError("The last shadow bucket must be unbounded")
        return buckets

    def bucket_for(self, blur: float) -> str:
        """Get the semantic size for a blur radius."""
        for bucket in self.shadow_buckets:
            if bucket.contains(blur):
                return bucket.size
        return self.shadow_buckets[-1].size


class TokensConfig(BaseModel):
    """Complete configuration bundle, as loaded from YAML."""

    schema_version: SchemaVersion = Field("tokens-config/v1", alias="schema")
    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig)
    matching: MatchingConfig = Field(default_factory=MatchingConfig)

    model_config = {"frozen": True, "populate_by_name": True}

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to YAML-serializable dictionary."""
        return {
            "schema": self.schema_version,
            "extraction": {
                "spacing_keywords": list(self.extraction.spacing_keywords),
                "radii_keywords": list(self.extraction.radii_keywords),
                "shadow_keywords": list(self.extraction.shadow_keywords),
                "path_denylist": list(self.extraction.path_denylist),
                "root_path": self.extraction.root_path,
                "simplify_paths": self.extraction.simplify_paths,
                "deprioritize_overlays": self.extraction.deprioritize_overlays,
            },
            "matching": {
                "shadow_buckets": [
                    {"size": b.size, "max_blur": b.max_blur}
                    for b in self.matching.shadow_buckets
                ],
                "no_shadow_bucket": self.matching.no_shadow_bucket,
                "speculative_shadow_prefix": self.matching.speculative_shadow_prefix,
                "line_height_offsets": list(self.matching.line_height_offsets),
                "size_offsets": list(self.matching.size_offsets),
                "weight_offsets": list(self.matching.weight_offsets),
                "numeric_tolerance": self.matching.numeric_tolerance,
                "color_suggestion_threshold": self.matching.color_suggestion_threshold,
            },
        }
