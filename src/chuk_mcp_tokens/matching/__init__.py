"""
Token matching - resolving design values to theme token paths.

- TokenMatcher: Pure per-category matching primitive
- typography_candidates / resolve_with_tolerance: Tolerance search
- expand_numeric_keys: Pre-expanded spacing/radii keys
- UnmappedReport: Unmatched value collection
- TokenResolver / resolve_values: Batch resolution
"""

from chuk_mcp_tokens.matching.matcher import TokenMatcher
from chuk_mcp_tokens.matching.reporter import UnmappedReport
from chuk_mcp_tokens.matching.resolver import Resolution, TokenResolver, resolve_values
from chuk_mcp_tokens.matching.tolerance import (
    expand_numeric_keys,
    normalize_design_weight,
    resolve_with_tolerance,
    typography_candidates,
)

__all__ = [
    "Resolution",
    "TokenMatcher",
    "TokenResolver",
    "UnmappedReport",
    "expand_numeric_keys",
    "normalize_design_weight",
    "resolve_values",
    "resolve_with_tolerance",
    "typography_candidates",
]
