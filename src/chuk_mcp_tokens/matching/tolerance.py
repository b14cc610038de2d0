"""
Tolerance search - bounded perturbations around a design value.

The matcher only does exact lookups. Small discrepancies between a design
file and a theme (a 21px line height against a 20px token, weight 590
against 600) are recovered here by generating nearby candidate values and
feeding each one to the matcher, in a fixed order.
"""

from __future__ import annotations

from collections.abc import Iterator

from chuk_mcp_tokens.constants import MatchStrategy, TokenCategory
from chuk_mcp_tokens.core.scoring import path_complexity
from chuk_mcp_tokens.extraction.keys import normalize_weight
from chuk_mcp_tokens.matching.matcher import TokenMatcher
from chuk_mcp_tokens.models.config import MatchingConfig
from chuk_mcp_tokens.models.token import MatchResult, ProjectTokenIndex
from chuk_mcp_tokens.models.values import DesignValue, TypographyValue

MIN_FONT_WEIGHT = 100
MAX_FONT_WEIGHT = 900


def normalize_design_weight(design_value: DesignValue) -> DesignValue:
    """Round a typography value's weight to the nearest hundred."""
    style = design_value.value
    if not isinstance(style, TypographyValue) or style.font_weight is None:
        return design_value
    weight = normalize_weight(style.font_weight)
    if weight == style.font_weight:
        return design_value
    return design_value.with_value(style.model_copy(update={"font_weight": weight}))


def typography_candidates(
    design_value: DesignValue,
    config: MatchingConfig | None = None,
) -> Iterator[DesignValue]:
    """
    Yield the value itself, then its tolerance neighbours.

    Order: exact, line-height offsets, font-size offsets, weight offsets.
    Offsets are only applied to fields the value actually has.

    Args:
        design_value: Typography design value (weight already normalized)
        config: Matching configuration with the offset lists

    Yields:
        Candidate design values
    """
    config = config or MatchingConfig()
    yield design_value

    style = design_value.value
    if not isinstance(style, TypographyValue):
        return

    if style.line_height:
        for offset in config.line_height_offsets:
            yield design_value.with_value(
                style.model_copy(update={"line_height": style.line_height + offset})
            )

    if style.font_size:
        for offset in config.size_offsets:
            yield design_value.with_value(
                style.model_copy(update={"font_size": style.font_size + offset})
            )

    if style.font_weight:
        for offset in config.weight_offsets:
            weight = style.font_weight + offset
            if MIN_FONT_WEIGHT <= weight <= MAX_FONT_WEIGHT:
                yield design_value.with_value(style.model_copy(update={"font_weight": weight}))


def resolve_with_tolerance(
    matcher: TokenMatcher,
    design_value: DesignValue,
    config: MatchingConfig | None = None,
) -> MatchResult:
    """
    Resolve a value, retrying typography with tolerance candidates.

    Non-typography values are matched once. A hit on a perturbed candidate
    is reported with strategy 'tolerance' and the original normalized value.
    """
    if design_value.category != TokenCategory.TYPOGRAPHY:
        return matcher.match(design_value)

    candidates = typography_candidates(design_value, config)
    first = matcher.match(next(candidates))
    if first.matched:
        return first

    for candidate in candidates:
        result = matcher.match(candidate)
        if result.matched and result.path is not None:
            return MatchResult.hit(
                first.category, result.path, first.normalized_value, MatchStrategy.TOLERANCE
            )
    return first


def expand_numeric_keys(
    index: ProjectTokenIndex,
    category: TokenCategory,
    tolerance: int,
) -> ProjectTokenIndex:
    """
    Copy an index with neighbouring numeric keys added for one category.

    Every key within `tolerance` of an exact key (and not itself exact)
    maps to the path of its nearest exact key; equally near keys prefer
    the simpler path, then the earlier one. Exact keys are never changed.

    Args:
        index: Source index (not modified)
        category: TokenCategory.SPACING or TokenCategory.RADII
        tolerance: Maximum distance in pixels

    Returns:
        A new index
    """
    if category not in (TokenCategory.SPACING, TokenCategory.RADII):
        raise ValueError(f"Only spacing and radii keys can be expanded, not {category.value}")

    expanded = index.model_copy(deep=True)
    if tolerance <= 0:
        return expanded

    exact = index.category_map(category)
    target = expanded.category_map(category)

    neighbours: dict[int | float, None] = {}
    for key in exact:
        for step in range(1, tolerance + 1):
            for candidate in (key - step, key + step):
                if candidate >= 0 and candidate not in exact:
                    neighbours[candidate] = None

    for candidate in neighbours:
        target[candidate] = _nearest_path(exact, candidate)

    return expanded


def _nearest_path(exact: dict[int | float, str], candidate: int | float) -> str:
    """Path of the exact key closest to candidate (simpler path on ties)."""
    _, path = min(
        exact.items(),
        key=lambda item: (abs(item[0] - candidate), path_complexity(item[1])),
    )
    return path
