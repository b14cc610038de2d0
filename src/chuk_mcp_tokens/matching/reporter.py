"""
Unmapped reporter - collects design values that found no token.

The emission stage uses these lists to annotate raw literals for manual
review. Values are kept unique, in the order they were first seen.
"""

from __future__ import annotations

from typing import Any

from chuk_mcp_tokens.constants import TokenCategory
from chuk_mcp_tokens.core.colors import find_closest_color
from chuk_mcp_tokens.models.token import MatchResult, ProjectTokenIndex


class UnmappedReport:
    """
    Aggregates unmatched colors, spacing and radii.

    Shadows and typography are not listed; an unmatched shadow is emitted
    as raw properties and only its color is reported (see TokenResolver).
    """

    def __init__(self) -> None:
        self._colors: dict[str, None] = {}
        self._spacing: dict[int | float, None] = {}
        self._radii: dict[int | float, None] = {}

    def record(self, result: MatchResult) -> bool:
        """
        Record a match result if it is an unmatched color, spacing or radius.

        Returns:
            True if the value was recorded
        """
        if result.matched:
            return False
        if result.category == TokenCategory.COLOR:
            self._colors.setdefault(result.normalized_value, None)
        elif result.category == TokenCategory.SPACING:
            self._spacing.setdefault(result.normalized_value, None)
        elif result.category == TokenCategory.RADII:
            self._radii.setdefault(result.normalized_value, None)
        else:
            return False
        return True

    @property
    def colors(self) -> list[str]:
        """Unmatched colors (upper-case hex)."""
        return list(self._colors)

    @property
    def spacing(self) -> list[int | float]:
        """Unmatched spacing values."""
        return list(self._spacing)

    @property
    def radii(self) -> list[int | float]:
        """Unmatched corner radii."""
        return list(self._radii)

    def is_empty(self) -> bool:
        """Check if nothing was recorded."""
        return not (self._colors or self._spacing or self._radii)

    def suggestions(
        self,
        index: ProjectTokenIndex,
        threshold: float = 8.0,
    ) -> dict[str, dict[str, Any]]:
        """
        Suggest the perceptually nearest theme color for each unmatched color.

        Suggestions are for review comments only; they are never applied
        as matches.

        Args:
            index: Index whose colors are candidates
            threshold: Maximum CIE76 Delta-E

        Returns:
            Mapping of unmatched color -> {"path", "distance"}
        """
        candidates = list(index.colors.items())
        result: dict[str, dict[str, Any]] = {}
        for color in self._colors:
            closest = find_closest_color(color, candidates, threshold)
            if closest is not None:
                path, distance = closest
                result[color] = {"path": path, "distance": round(distance, 2)}
        return result

    def to_dict(self) -> dict[str, list[Any]]:
        """Convert to the {'colors', 'spacing', 'radii'} lists."""
        return {
            "colors": self.colors,
            "spacing": self.spacing,
            "radii": self.radii,
        }

    def __repr__(self) -> str:
        return (
            f"UnmappedReport(colors={len(self._colors)}, "
            f"spacing={len(self._spacing)}, radii={len(self._radii)})"
        )
