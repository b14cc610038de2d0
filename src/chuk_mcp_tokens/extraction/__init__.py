"""
Theme extraction - from an unknown-shape theme tree to a token index.

- classify / to_theme_token: Category classification at the input boundary
- ThemeWalker / walk: Recursive traversal and registration
- index_keys / typography_keys / shadow_key: Composite key building
- merge_indices: Combine indices from several sources
"""

from chuk_mcp_tokens.extraction.classifier import classify, to_theme_token
from chuk_mcp_tokens.extraction.keys import (
    index_keys,
    normalize_weight,
    shadow_key,
    typography_keys,
    typography_lookup_keys,
)
from chuk_mcp_tokens.extraction.merger import merge_indices
from chuk_mcp_tokens.extraction.walker import ThemeWalker, iter_tokens, register_token, walk

__all__ = [
    "ThemeWalker",
    "classify",
    "index_keys",
    "iter_tokens",
    "merge_indices",
    "normalize_weight",
    "register_token",
    "shadow_key",
    "to_theme_token",
    "typography_keys",
    "typography_lookup_keys",
    "walk",
]
