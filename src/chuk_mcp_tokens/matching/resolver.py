"""
Token resolver - runs a stream of design values through the matcher.

The resolver is the caller the matcher expects: it normalizes font
weights, drives the tolerance search, and collects unmatched values.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from chuk_mcp_tokens.constants import CATEGORY_FIELDS, TokenCategory
from chuk_mcp_tokens.matching.matcher import TokenMatcher
from chuk_mcp_tokens.matching.reporter import UnmappedReport
from chuk_mcp_tokens.matching.tolerance import (
    expand_numeric_keys,
    normalize_design_weight,
    resolve_with_tolerance,
)
from chuk_mcp_tokens.models.config import MatchingConfig
from chuk_mcp_tokens.models.token import MatchResult, ProjectTokenIndex
from chuk_mcp_tokens.models.values import ColorValue, DesignValue, ShadowValue

logger = logging.getLogger(__name__)


@dataclass
class Resolution:
    """Results of resolving a batch of design values."""

    results: list[MatchResult] = field(default_factory=list)
    unmapped: UnmappedReport = field(default_factory=UnmappedReport)

    @property
    def mappings(self) -> dict[str, dict[str, str]]:
        """Matched values per category: normalized value -> token path."""
        mappings: dict[str, dict[str, str]] = {name: {} for name in CATEGORY_FIELDS.values()}
        for result in self.results:
            if result.matched and result.path is not None:
                name = CATEGORY_FIELDS[result.category]
                mappings[name].setdefault(str(result.normalized_value), result.path)
        return mappings

    @property
    def matched_count(self) -> int:
        """Number of matched results."""
        return sum(1 for r in self.results if r.matched)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "results": [r.to_dict() for r in self.results],
            "mappings": self.mappings,
            "unmapped": self.unmapped.to_dict(),
            "matched": self.matched_count,
            "total": len(self.results),
        }


class TokenResolver:
    """
    Resolves design values against a project token index.

    Wraps a TokenMatcher with the caller-side strategy: weight
    normalization, typography tolerance search, optional spacing/radii
    key widening, and unmapped value collection.
    """

    def __init__(
        self,
        index: ProjectTokenIndex,
        has_project_theme: bool = False,
        config: MatchingConfig | None = None,
        tolerance: bool = True,
    ):
        """
        Initialize the resolver.

        Args:
            index: Index to resolve against
            has_project_theme: Allow speculative semantic shadow paths
            config: Matching configuration
            tolerance: Retry typography with tolerance candidates
        """
        self.config = config or MatchingConfig()
        self.tolerance = tolerance

        if self.config.numeric_tolerance > 0:
            for category in (TokenCategory.SPACING, TokenCategory.RADII):
                index = expand_numeric_keys(index, category, self.config.numeric_tolerance)

        self.matcher = TokenMatcher(index, has_project_theme=has_project_theme, config=self.config)

    def resolve(self, design_value: DesignValue) -> MatchResult:
        """Resolve a single design value."""
        design_value = normalize_design_weight(design_value)
        if self.tolerance:
            return resolve_with_tolerance(self.matcher, design_value, self.config)
        return self.matcher.match(design_value)

    def resolve_all(self, values: Iterable[DesignValue]) -> Resolution:
        """
        Resolve a batch of design values.

        Returns:
            Resolution with one result per value, in input order
        """
        resolution = Resolution()
        for value in values:
            result = self.resolve(value)
            resolution.results.append(result)
            resolution.unmapped.record(result)
            if not result.matched and isinstance(value.value, ShadowValue):
                self._record_shadow_color(value.value, resolution.unmapped)

        logger.debug(
            "Resolved %d/%d design values (%r)",
            resolution.matched_count,
            len(resolution.results),
            resolution.unmapped,
        )
        return resolution

    def _record_shadow_color(self, shadow: ShadowValue, unmapped: UnmappedReport) -> None:
        """Report the color of a shadow that will be emitted as raw values."""
        if not shadow.color:
            return
        try:
            color = ColorValue(hex=shadow.color)
        except ValidationError:
            logger.debug("Ignoring unparseable shadow color %r", shadow.color)
            return
        unmapped.record(self.matcher.match_color(color))


def resolve_values(
    values: Iterable[DesignValue],
    index: ProjectTokenIndex,
    has_project_theme: bool = False,
    config: MatchingConfig | None = None,
    tolerance: bool = True,
) -> Resolution:
    """
    Resolve a batch of design values against an index.

    Convenience wrapper around TokenResolver.resolve_all.
    """
    resolver = TokenResolver(
        index, has_project_theme=has_project_theme, config=config, tolerance=tolerance
    )
    return resolver.resolve_all(values)
