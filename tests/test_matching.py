"""
Tests for token matching.

Tests cover:
- TokenMatcher per-category strategies
- Tolerance candidates and resolution
- Pre-expanded numeric keys
- UnmappedReport
- TokenResolver / resolve_values end to end
"""

from typing import Any

import pytest

from chuk_mcp_tokens.constants import MatchStrategy, TokenCategory
from chuk_mcp_tokens.extraction import ThemeWalker
from chuk_mcp_tokens.matching import (
    TokenMatcher,
    TokenResolver,
    UnmappedReport,
    expand_numeric_keys,
    normalize_design_weight,
    resolve_values,
    resolve_with_tolerance,
    typography_candidates,
)
from chuk_mcp_tokens.models import (
    ContextHints,
    DesignValue,
    MatchingConfig,
    MatchResult,
    ProjectTokenIndex,
    ShadowValue,
    TypographyValue,
)


def dv(**record: Any) -> DesignValue:
    return DesignValue.parse(record)


def shadow(blur: float, offset_y: float = 2, hints: ContextHints | None = None) -> DesignValue:
    return DesignValue(
        value=ShadowValue(offset_x=0, offset_y=offset_y, blur=blur),
        hints=hints or ContextHints(),
    )


def text(**fields: Any) -> DesignValue:
    return DesignValue(value=TypographyValue(**fields))


class TestMatchColor:
    """Tests for color matching."""

    def test_exact(self, sample_index: ProjectTokenIndex):
        """Colors match on the normalized hex."""
        result = TokenMatcher(sample_index).match(dv(category="color", hex="#3b82f6"))
        assert result.matched
        assert result.path == "theme.colors.primary"
        assert result.strategy == MatchStrategy.EXACT

    def test_case_insensitive(self, sample_index: ProjectTokenIndex):
        """Upper and lower case hex resolve to the same token."""
        matcher = TokenMatcher(sample_index)
        lower = matcher.match(dv(category="color", hex="#6b7280"))
        upper = matcher.match(dv(category="color", hex="#6B7280"))
        assert lower.path == upper.path == "theme.colors.text.muted"

    def test_shorthand(self, sample_index: ProjectTokenIndex):
        """#fff matches a #FFFFFF token."""
        result = TokenMatcher(sample_index).match(dv(category="color", hex="#fff"))
        assert result.path == "theme.colors.background"

    def test_miss(self, sample_index: ProjectTokenIndex):
        """Near colors are not matched."""
        result = TokenMatcher(sample_index).match(dv(category="color", hex="#3B82F7"))
        assert not result.matched
        assert result.normalized_value == "#3B82F7"


class TestMatchNumber:
    """Tests for spacing and radii matching."""

    def test_spacing(self, sample_index: ProjectTokenIndex):
        """Spacing matches exactly."""
        result = TokenMatcher(sample_index).match(dv(category="spacing", value=16))
        assert result.path == "theme.spacing.md"

    def test_float_spacing(self, sample_index: ProjectTokenIndex):
        """16.0 matches the 16 token."""
        result = TokenMatcher(sample_index).match(dv(category="spacing", value=16.0))
        assert result.path == "theme.spacing.md"

    def test_radii_separate_from_spacing(self, sample_index: ProjectTokenIndex):
        """The same number resolves per category."""
        matcher = TokenMatcher(sample_index)
        assert matcher.match(dv(category="radii", value=8)).path == "theme.radius.md"
        assert matcher.match(dv(category="spacing", value=8)).path == "theme.spacing.sm"

    def test_miss(self, sample_index: ProjectTokenIndex):
        """No tolerance without pre-expanded keys."""
        result = TokenMatcher(sample_index).match(dv(category="spacing", value=15))
        assert not result.matched
        assert result.normalized_value == 15


class TestMatchShadow:
    """Tests for shadow matching."""

    def test_exact(self, sample_index: ProjectTokenIndex):
        """An identical shadow matches its token."""
        result = TokenMatcher(sample_index).match(shadow(blur=8, offset_y=4))
        assert result.path == "theme.shadows.md"
        assert result.strategy == MatchStrategy.EXACT

    def test_color_not_in_key(self, sample_index: ProjectTokenIndex):
        """Shadow color does not affect matching."""
        value = dv(category="shadow", offsetX=0, offsetY=4, blur=8, color="#FF0000")
        assert TokenMatcher(sample_index).match(value).path == "theme.shadows.md"

    def test_bucket_fallback(self, sample_index: ProjectTokenIndex):
        """A blur of 5 falls back to the registered .sm shadow."""
        result = TokenMatcher(sample_index).match(shadow(blur=5))
        assert result.matched
        assert result.path == "theme.shadows.sm"
        assert result.strategy == MatchStrategy.BUCKET
        assert result.normalized_value == "0,2,5,0"

    def test_md_bucket(self, sample_index: ProjectTokenIndex):
        """A blur of 10 falls back to .md."""
        assert TokenMatcher(sample_index).match(shadow(blur=10)).path == "theme.shadows.md"

    def test_none_bucket_never_falls_back(self, sample_index: ProjectTokenIndex):
        """Blur up to 2 is a miss even with theme infrastructure."""
        result = TokenMatcher(sample_index, has_project_theme=True).match(shadow(blur=1))
        assert not result.matched

    def test_speculative_with_project_theme(self, sample_index: ProjectTokenIndex):
        """Without an .lg token, a project theme gets theme.shadows.lg."""
        result = TokenMatcher(sample_index, has_project_theme=True).match(shadow(blur=20))
        assert result.matched
        assert result.path == "theme.shadows.lg"
        assert result.strategy == MatchStrategy.SPECULATIVE

    def test_no_speculation_without_project_theme(self, sample_index: ProjectTokenIndex):
        """Without theme infrastructure an unmatched shadow is a miss."""
        result = TokenMatcher(sample_index, has_project_theme=False).match(shadow(blur=20))
        assert not result.matched

    def test_speculative_on_empty_index(self):
        """Speculation works even when nothing was extracted."""
        result = TokenMatcher(ProjectTokenIndex(), has_project_theme=True).match(shadow(blur=4))
        assert result.path == "theme.shadows.sm"

    def test_bucket_prefers_simplest_path(self):
        """The simplest .sm path is chosen."""
        index = ThemeWalker().extract(
            {
                "elevation": {"card": {"sm": {"offsetY": 1, "blur": 2, "color": "#000"}}},
                "shadows": {"sm": {"offsetY": 1, "blur": 4, "color": "#000"}},
            }
        )
        assert TokenMatcher(index).match(shadow(blur=5)).path == "theme.shadows.sm"

    def test_bucket_prefers_hinted_path(self):
        """A path containing a hinted keyword wins over a simpler one."""
        index = ThemeWalker().extract(
            {
                "elevation": {"card": {"sm": {"offsetY": 1, "blur": 2, "color": "#000"}}},
                "shadows": {"sm": {"offsetY": 1, "blur": 4, "color": "#000"}},
            }
        )
        hints = ContextHints(path_keywords=["card"])
        result = TokenMatcher(index).match(shadow(blur=5, hints=hints))
        assert result.path == "theme.elevation.card.sm"

    def test_custom_prefix(self):
        """The speculative prefix is configurable."""
        config = MatchingConfig(speculative_shadow_prefix="tokens.elevation")
        matcher = TokenMatcher(ProjectTokenIndex(), has_project_theme=True, config=config)
        assert matcher.match(shadow(blur=10)).path == "tokens.elevation.md"


class TestMatchTypography:
    """Tests for typography matching."""

    def test_family_key(self, sample_index: ProjectTokenIndex):
        """A style with its family matches the family-qualified key."""
        value = text(font_family="Inter", font_size=16, font_weight=400, line_height=24)
        result = TokenMatcher(sample_index).match(value)
        assert result.path == "theme.typography.body"
        assert result.strategy == MatchStrategy.FAMILY

    def test_family_from_hints(self, sample_index: ProjectTokenIndex):
        """The family hint is used when the value has none."""
        value = DesignValue(
            value=TypographyValue(font_size=16, font_weight=400, line_height=24),
            hints=ContextHints(font_family="Inter"),
        )
        result = TokenMatcher(sample_index).match(value)
        assert result.strategy == MatchStrategy.FAMILY

    def test_wildcard_fallback(self, sample_index: ProjectTokenIndex):
        """A different family falls back to the wildcard key."""
        value = text(font_family="Roboto", font_size=16, font_weight=400, line_height=24)
        result = TokenMatcher(sample_index).match(value)
        assert result.path == "theme.typography.body"
        assert result.strategy == MatchStrategy.WILDCARD
        assert result.normalized_value == "Roboto-16-400-24"

    def test_neighbour_weight(self, sample_index: ProjectTokenIndex):
        """A 400 token also covers 500."""
        value = text(font_size=16, font_weight=500, line_height=24)
        assert TokenMatcher(sample_index).match(value).path == "theme.typography.body"

    @pytest.mark.parametrize("weight", [600, 700])
    def test_bold_variant_weights(self, sample_index: ProjectTokenIndex, weight: int):
        """A .bold token matches 600 and 700."""
        value = text(font_size=24, font_weight=weight, line_height=32)
        assert TokenMatcher(sample_index).match(value).path == "theme.typography.heading.bold"

    def test_bold_variant_not_regular(self, sample_index: ProjectTokenIndex):
        """A .bold token does not match 400."""
        value = text(font_size=24, font_weight=400, line_height=32)
        assert not TokenMatcher(sample_index).match(value).matched


class TestTolerance:
    """Tests for tolerance search."""

    def test_candidate_order(self):
        """Exact first, then line height, size and weight offsets."""
        value = text(font_size=16, font_weight=400, line_height=24)
        candidates = [
            (c.value.font_size, c.value.font_weight, c.value.line_height)
            for c in typography_candidates(value)
        ]
        assert candidates == [
            (16, 400, 24),
            (16, 400, 25),
            (16, 400, 23),
            (16, 400, 26),
            (16, 400, 22),
            (17, 400, 24),
            (15, 400, 24),
            (16, 500, 24),
            (16, 300, 24),
        ]

    def test_weights_stay_in_range(self):
        """Weights outside 100-900 are not generated."""
        value = text(font_weight=900)
        weights = [c.value.font_weight for c in typography_candidates(value)]
        assert weights == [900, 800]

    def test_missing_fields_not_perturbed(self):
        """Only fields the value has get offsets."""
        assert len(list(typography_candidates(text(font_size=16)))) == 3

    def test_non_typography_single_candidate(self):
        """Other categories yield only themselves."""
        value = dv(category="spacing", value=16)
        assert list(typography_candidates(value)) == [value]

    def test_tolerance_hit(self, sample_index: ProjectTokenIndex):
        """A line height one off resolves through tolerance."""
        value = text(font_family="Inter", font_size=16, font_weight=400, line_height=25)
        result = resolve_with_tolerance(TokenMatcher(sample_index), value)
        assert result.matched
        assert result.path == "theme.typography.body"
        assert result.strategy == MatchStrategy.TOLERANCE
        assert result.normalized_value == "Inter-16-400-25"

    def test_exact_preferred(self, sample_index: ProjectTokenIndex):
        """An exact hit is returned unchanged."""
        value = text(font_family="Inter", font_size=16, font_weight=400, line_height=24)
        result = resolve_with_tolerance(TokenMatcher(sample_index), value)
        assert result.strategy == MatchStrategy.FAMILY

    def test_tolerance_miss(self, sample_index: ProjectTokenIndex):
        """Values outside every offset stay unmatched."""
        value = text(font_size=40, font_weight=400, line_height=48)
        assert not resolve_with_tolerance(TokenMatcher(sample_index), value).matched

    def test_normalize_design_weight(self):
        """Design weights round to the nearest hundred."""
        assert normalize_design_weight(text(font_weight=590)).value.font_weight == 600
        unchanged = text(font_size=12)
        assert normalize_design_weight(unchanged) is unchanged


class TestExpandNumericKeys:
    """Tests for expand_numeric_keys."""

    def _index(self, spacing: dict) -> ProjectTokenIndex:
        return ProjectTokenIndex(spacing=spacing)

    def test_neighbours_added(self):
        """Keys within tolerance map to the nearest exact token."""
        index = self._index({8: "theme.spacing.sm", 16: "theme.spacing.md"})
        expanded = expand_numeric_keys(index, TokenCategory.SPACING, 1)
        assert expanded.spacing[7] == "theme.spacing.sm"
        assert expanded.spacing[9] == "theme.spacing.sm"
        assert expanded.spacing[15] == "theme.spacing.md"
        assert expanded.spacing[17] == "theme.spacing.md"
        assert 10 not in expanded.spacing

    def test_source_unchanged(self):
        """The input index is not modified."""
        index = self._index({8: "theme.spacing.sm"})
        expand_numeric_keys(index, TokenCategory.SPACING, 2)
        assert index.spacing == {8: "theme.spacing.sm"}

    def test_exact_keys_kept(self):
        """Exact keys are never overwritten by neighbours."""
        index = self._index({8: "theme.spacing.sm", 9: "theme.spacing.nine"})
        expanded = expand_numeric_keys(index, TokenCategory.SPACING, 1)
        assert expanded.spacing[8] == "theme.spacing.sm"
        assert expanded.spacing[9] == "theme.spacing.nine"

    def test_equidistant_prefers_simpler(self):
        """Equally near keys prefer the simpler path."""
        index = self._index({8: "theme.spacing.small", 16: "theme.spacing.md"})
        expanded = expand_numeric_keys(index, TokenCategory.SPACING, 4)
        assert expanded.spacing[12] == "theme.spacing.md"

    def test_no_negative_keys(self):
        """Neighbours below zero are not added."""
        index = self._index({0: "theme.spacing.none"})
        expanded = expand_numeric_keys(index, TokenCategory.SPACING, 2)
        assert sorted(expanded.spacing) == [0, 1, 2]

    def test_rejects_other_categories(self):
        """Only spacing and radii can be expanded."""
        with pytest.raises(ValueError):
            expand_numeric_keys(ProjectTokenIndex(), TokenCategory.COLOR, 1)


class TestUnmappedReport:
    """Tests for UnmappedReport."""

    def test_records_unique_in_order(self):
        """Values are kept once, in first-seen order."""
        report = UnmappedReport()
        for color in ("#222222", "#111111", "#222222"):
            report.record(MatchResult.miss(TokenCategory.COLOR, color))
        assert report.colors == ["#222222", "#111111"]

    def test_ignores_matches(self):
        """Matched results are not recorded."""
        report = UnmappedReport()
        hit = MatchResult.hit(TokenCategory.SPACING, "theme.spacing.md", 16)
        assert report.record(hit) is False
        assert report.is_empty()

    def test_ignores_shadow_and_typography(self):
        """Only colors, spacing and radii are listed."""
        report = UnmappedReport()
        assert report.record(MatchResult.miss(TokenCategory.SHADOW, "0,2,5,0")) is False
        assert report.record(MatchResult.miss(TokenCategory.TYPOGRAPHY, "*-1-400-1")) is False
        assert report.is_empty()

    def test_to_dict(self):
        """to_dict lists each category."""
        report = UnmappedReport()
        report.record(MatchResult.miss(TokenCategory.SPACING, 13))
        report.record(MatchResult.miss(TokenCategory.RADII, 6))
        assert report.to_dict() == {"colors": [], "spacing": [13], "radii": [6]}

    def test_suggestions(self, sample_index: ProjectTokenIndex):
        """Unmatched colors get the nearest theme color within the threshold."""
        report = UnmappedReport()
        report.record(MatchResult.miss(TokenCategory.COLOR, "#3B82F7"))
        report.record(MatchResult.miss(TokenCategory.COLOR, "#00FF00"))
        suggestions = report.suggestions(sample_index)
        assert suggestions["#3B82F7"]["path"] == "theme.colors.primary"
        assert "#00FF00" not in suggestions


class TestResolveValues:
    """End-to-end resolution against an extracted index."""

    def test_mixed_batch(self, sample_index: ProjectTokenIndex):
        """Matched values map to paths; unmatched ones are reported."""
        values = [
            dv(category="color", hex="#3b82f6"),
            dv(category="color", hex="#123456"),
            dv(category="spacing", value=16),
            dv(category="spacing", value=13),
            dv(category="radii", value=4),
            dv(category="radii", value=6),
            dv(category="shadow", offsetY=6, blur=30, color="#abcdef"),
            dv(category="color", hex="#123456"),
        ]
        resolution = resolve_values(values, sample_index)

        assert len(resolution.results) == len(values)
        assert resolution.matched_count == 3
        assert resolution.unmapped.colors == ["#123456", "#ABCDEF"]
        assert resolution.unmapped.spacing == [13]
        assert resolution.unmapped.radii == [6]
        assert resolution.mappings["colors"] == {"#3B82F6": "theme.colors.primary"}
        assert resolution.mappings["spacing"] == {"16": "theme.spacing.md"}
        assert resolution.mappings["radii"] == {"4": "theme.radius.sm"}

    def test_tokens_root_end_to_end(self):
        """A color under a tokens root resolves through the simplified path."""
        index = ThemeWalker().extract({"tokens": {"color": {"primary": "#3B82F6"}}})
        resolution = resolve_values([dv(category="color", rawValue="#3b82f6")], index)

        result = resolution.results[0]
        assert result.matched
        assert result.path == "theme.color.primary"
        assert resolution.unmapped.colors == []

    def test_unmapped_color_end_to_end(self):
        """A color missing from the theme shows up in the unmapped list."""
        index = ThemeWalker().extract({"colors": {"primary": "#3B82F6"}})
        resolution = resolve_values([dv(category="color", hex="#ef4444")], index)
        assert resolution.unmapped.colors == ["#EF4444"]

    def test_matched_shadow_color_not_reported(self, sample_index: ProjectTokenIndex):
        """Only unmatched shadows report their color."""
        value = dv(category="shadow", offsetY=4, blur=8, color="#abcdef")
        resolution = resolve_values([value], sample_index)
        assert resolution.unmapped.is_empty()

    def test_speculative_shadow(self, sample_index: ProjectTokenIndex):
        """has_project_theme enables speculative shadows."""
        value = dv(category="shadow", offsetY=6, blur=30)
        resolution = resolve_values([value], sample_index, has_project_theme=True)
        assert resolution.results[0].path == "theme.shadows.lg"
        assert resolution.mappings["shadows"] == {"0,6,30,0": "theme.shadows.lg"}

    def test_weight_normalized(self, sample_index: ProjectTokenIndex):
        """A 590 weight resolves against the 600 key."""
        value = dv(category="typography", fontSize=24, fontWeight=590, lineHeight=32)
        resolution = resolve_values([value], sample_index, tolerance=False)
        assert resolution.results[0].path == "theme.typography.heading.bold"

    def test_tolerance_toggle(self, sample_index: ProjectTokenIndex):
        """Typography tolerance can be disabled."""
        value = dv(category="typography", fontSize=16, fontWeight=400, lineHeight=25)
        assert resolve_values([value], sample_index).results[0].matched
        assert not resolve_values([value], sample_index, tolerance=False).results[0].matched

    def test_numeric_tolerance(self, sample_index: ProjectTokenIndex):
        """numeric_tolerance widens spacing and radii matches."""
        values = [dv(category="spacing", value=15), dv(category="radii", value=5)]
        plain = resolve_values(values, sample_index)
        assert plain.matched_count == 0

        widened = resolve_values(values, sample_index, config=MatchingConfig(numeric_tolerance=1))
        assert widened.results[0].path == "theme.spacing.md"
        assert widened.results[1].path == "theme.radius.sm"

    def test_resolver_does_not_modify_index(self, sample_index: ProjectTokenIndex):
        """Widening works on a copy of the index."""
        TokenResolver(sample_index, config=MatchingConfig(numeric_tolerance=2))
        assert 15 not in sample_index.spacing

    def test_to_dict(self, sample_index: ProjectTokenIndex):
        """Resolutions serialize with counts."""
        resolution = resolve_values([dv(category="spacing", value=16)], sample_index)
        data = resolution.to_dict()
        assert data["matched"] == 1
        assert data["total"] == 1
        assert data["results"][0]["path"] == "theme.spacing.md"
        assert data["unmapped"] == {"colors": [], "spacing": [], "radii": []}
