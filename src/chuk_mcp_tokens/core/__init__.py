"""
Core primitives shared by extraction and matching.

- path_complexity: Structural simplicity score for token paths
- simplify_path / child_path: Canonical token path handling
- normalize_hex / normalize_color: Color key normalization
- find_closest_color: Delta-E nearest color lookup
"""

from chuk_mcp_tokens.core.colors import (
    color_to_lab,
    find_closest_color,
    is_hex_color,
    lab_distance,
    normalize_color,
    normalize_hex,
)
from chuk_mcp_tokens.core.paths import (
    child_path,
    ends_with_segment,
    join_path,
    simplify_path,
    split_path,
)
from chuk_mcp_tokens.core.scoring import is_simpler, path_complexity

__all__ = [
    # Scoring
    "path_complexity",
    "is_simpler",
    # Paths
    "child_path",
    "ends_with_segment",
    "join_path",
    "simplify_path",
    "split_path",
    # Colors
    "color_to_lab",
    "find_closest_color",
    "is_hex_color",
    "lab_distance",
    "normalize_color",
    "normalize_hex",
]
