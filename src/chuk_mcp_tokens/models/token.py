"""
Token index models.

A ProjectTokenIndex maps normalized keys to token paths, one map per
category. Registration keeps the structurally simplest path for each key.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, Field

from chuk_mcp_tokens.constants import CATEGORY_FIELDS, MatchStrategy, TokenCategory
from chuk_mcp_tokens.core.scoring import path_complexity
from chuk_mcp_tokens.models.values import TokenValue

IndexKey = str | int | float


class ThemeToken(BaseModel):
    """
    A single token found in a theme source.

    Immutable once extracted; only the index entry that points at it
    can be replaced by a simpler path.
    """

    path: str = Field(..., description="Access path, e.g. 'theme.colors.primary'")
    category: TokenCategory
    raw_value: Any = Field(..., description="Value as found in the theme tree")
    value: TokenValue = Field(..., description="Typed value used for key building")

    model_config = {"frozen": True}


class ProjectTokenIndex(BaseModel):
    """
    Category maps of normalized key -> token path.

    Keys per category:
    - colors: upper-case hex ('#3B82F6')
    - spacing / radii: number (16)
    - shadows: 'offsetX,offsetY,blur,spread'
    - typography: 'family-size-weight-lineHeight' and '*-size-weight-lineHeight'
    """

    colors: dict[str, str] = Field(default_factory=dict)
    spacing: dict[int | float, str] = Field(default_factory=dict)
    radii: dict[int | float, str] = Field(default_factory=dict)
    shadows: dict[str, str] = Field(default_factory=dict)
    typography: dict[str, str] = Field(default_factory=dict)

    def category_map(self, category: TokenCategory) -> dict[Any, str]:
        """Get the live map for a category."""
        return getattr(self, CATEGORY_FIELDS[category])

    def get(self, category: TokenCategory, key: IndexKey) -> str | None:
        """Look up the path registered for a key."""
        return self.category_map(category).get(key)

    def register(
        self,
        category: TokenCategory,
        key: IndexKey,
        path: str,
        deprioritize_overlays: bool = False,
    ) -> bool:
        """
        Map a key to a path, keeping the simplest path per key.

        An existing entry is only replaced when the new path is strictly
        simpler, so equal scores keep the first-registered path.

        Returns:
            True if the index changed
        """
        mapping = self.category_map(category)
        current = mapping.get(key)
        if current is not None and path_complexity(
            path, deprioritize_overlays
        ) >= path_complexity(current, deprioritize_overlays):
            return False
        mapping[key] = path
        return True

    def register_many(
        self,
        category: TokenCategory,
        keys: Iterable[IndexKey],
        path: str,
        deprioritize_overlays: bool = False,
    ) -> int:
        """
        Map several keys to one path as a single update.

        Every key is decided against the state before the call, then all
        accepted keys are written together.

        Returns:
            Number of keys written
        """
        mapping = self.category_map(category)
        score = path_complexity(path, deprioritize_overlays)
        writes: dict[IndexKey, str] = {}
        for key in keys:
            current = mapping.get(key)
            if current is None or score < path_complexity(current, deprioritize_overlays):
                writes[key] = path
        mapping.update(writes)
        return len(writes)

    def paths(self, category: TokenCategory) -> list[str]:
        """Distinct paths registered for a category, in insertion order."""
        return list(dict.fromkeys(self.category_map(category).values()))

    def count(self, category: TokenCategory | None = None) -> int:
        """Number of keys in one category, or in all of them."""
        if category is not None:
            return len(self.category_map(category))
        return sum(len(self.category_map(c)) for c in TokenCategory)

    def is_empty(self) -> bool:
        """Check if no category has any entry."""
        return self.count() == 0

    def summary(self) -> dict[str, int]:
        """Key counts per category."""
        return {CATEGORY_FIELDS[c]: len(self.category_map(c)) for c in TokenCategory}

    def to_dict(self) -> dict[str, dict[str, str]]:
        """Convert to a JSON-serializable dictionary (keys become strings)."""
        return {
            CATEGORY_FIELDS[c]: {_key_str(k): v for k, v in self.category_map(c).items()}
            for c in TokenCategory
        }


class MatchResult(BaseModel):
    """Outcome of resolving one design value against an index."""

    category: TokenCategory
    matched: bool
    path: str | None = None
    normalized_value: Any = Field(
        ..., description="Normalized value (or lookup key) that was resolved"
    )
    strategy: MatchStrategy = MatchStrategy.NONE

    model_config = {"frozen": True}

    @classmethod
    def hit(
        cls,
        category: TokenCategory,
        path: str,
        normalized_value: Any,
        strategy: MatchStrategy = MatchStrategy.EXACT,
    ) -> MatchResult:
        """Create a successful result."""
        return cls(
            category=category,
            matched=True,
            path=path,
            normalized_value=normalized_value,
            strategy=strategy,
        )

    @classmethod
    def miss(cls, category: TokenCategory, normalized_value: Any) -> MatchResult:
        """Create an unmatched result carrying the value back."""
        return cls(category=category, matched=False, normalized_value=normalized_value)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "category": self.category.value,
            "matched": self.matched,
            "path": self.path,
            "normalized_value": self.normalized_value,
            "strategy": self.strategy.value,
        }


def _key_str(key: IndexKey) -> str:
    if isinstance(key, float) and key.is_integer():
        return str(int(key))
    return str(key)
