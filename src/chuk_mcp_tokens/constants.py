"""
Constants and enums for the token system.

No magic strings - use enums and Literal types for constrained values.
"""

from enum import Enum
from typing import Literal


class TokenCategory(str, Enum):
    """
    Categories a theme value can be indexed under.

    Each category has its own key normalization (see extraction.keys).
    """

    COLOR = "color"
    SPACING = "spacing"
    RADII = "radii"
    SHADOW = "shadow"
    TYPOGRAPHY = "typography"


class MatchStrategy(str, Enum):
    """How a match result was obtained."""

    EXACT = "exact"
    FAMILY = "family"  # Family-qualified typography key
    WILDCARD = "wildcard"  # Wildcard-family typography key
    BUCKET = "bucket"  # Shadow resolved via semantic size bucket
    SPECULATIVE = "speculative"  # Assumed theme.shadows.<bucket>
    TOLERANCE = "tolerance"  # Hit on a perturbed candidate
    NONE = "none"


# Which index map holds each category
CATEGORY_FIELDS: dict[TokenCategory, str] = {
    TokenCategory.COLOR: "colors",
    TokenCategory.SPACING: "spacing",
    TokenCategory.RADII: "radii",
    TokenCategory.SHADOW: "shadows",
    TokenCategory.TYPOGRAPHY: "typography",
}

# Classifier keywords (matched case-insensitively against the property path)
DEFAULT_SPACING_KEYWORDS: tuple[str, ...] = ("spacing", "gap", "margin", "padding", "inset")
DEFAULT_RADII_KEYWORDS: tuple[str, ...] = ("radius", "radii", "corner")
DEFAULT_SHADOW_KEYWORDS: tuple[str, ...] = ("shadow", "elevation")

# Path segments removed by the simplifier (case-insensitive)
DEFAULT_PATH_DENYLIST: tuple[str, ...] = (
    "masterPalette",
    "clientPalette",
    "masterColors",
    "clientColors",
    "designTokens",
    "tokens",
    "palette",
    "theme",
    "colorsTheme",
)

THEME_ROOT = "theme"

# Blur radius upper bounds for the semantic shadow sizes
DEFAULT_SHADOW_BUCKETS: tuple[tuple[float, str], ...] = (
    (2, "none"),
    (6, "sm"),
    (12, "md"),
    (float("inf"), "lg"),
)

DEFAULT_FONT_WEIGHT = 400

# Variant suffixes on typography token paths
BOLD_SUFFIXES: tuple[str, ...] = ("bold", "semibold")
REGULAR_SUFFIXES: tuple[str, ...] = ("regular", "medium")
BOLD_WEIGHTS: tuple[int, ...] = (600, 700)
REGULAR_WEIGHTS: tuple[int, ...] = (400, 500)

# Named CSS weights accepted for an explicit fontWeight
NAMED_FONT_WEIGHTS: dict[str, int] = {
    "thin": 100,
    "extralight": 200,
    "light": 300,
    "normal": 400,
    "regular": 400,
    "medium": 500,
    "semibold": 600,
    "bold": 700,
    "extrabold": 800,
    "black": 900,
}

# Theme source file discovery
THEME_FILE_NAMES: tuple[str, ...] = (
    "theme.json",
    "theme.yaml",
    "theme.yml",
    "tokens.json",
    "tokens.yaml",
    "design-tokens.json",
)
THEME_DIRS: tuple[str, ...] = (
    "src/styles/theme",
    "src/theme",
    "src/styles",
    "theme",
    "styles",
    "src",
    ".",
)

# Schema versions - frozen for v1
SchemaVersion = Literal["tokens-config/v1"]


class ErrorMessages:
    """Standardized error messages."""

    INDEX_NOT_FOUND = "Token index '{name}' not found. Extract a theme first."
    THEME_NOT_FOUND = "Theme source not found: {path}"
    THEME_NOT_MAPPING = "Theme source {path} does not contain a mapping at its root."
    THEME_UNREADABLE = "Could not parse theme source {path}: {error}"
    UNSUPPORTED_THEME_FORMAT = "Unsupported theme source format: {path}"
    INVALID_DESIGN_VALUE = "Invalid design value: {error}"
    INVALID_CONFIG = "Invalid tokens config {path}: {error}"
    UNKNOWN_CATEGORY = "Unknown category '{category}'. Use one of: {valid}"


class SuccessMessages:
    """Standardized success messages."""

    INDEX_EXTRACTED = "Extracted token index '{name}' from {count} source(s)."
    INDEX_DELETED = "Deleted token index '{name}'."
