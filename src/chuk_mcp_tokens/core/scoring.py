"""
Path complexity scoring.

Lower scores are simpler paths and win whenever two paths compete for the
same normalized key. Flat paths beat nested ones; bracket access is
penalized more than dot access.
"""

from __future__ import annotations

DOT_WEIGHT = 10
BRACKET_WEIGHT = 20

# Substring penalties applied when overlays are deprioritized
OVERLAY_PENALTIES: tuple[tuple[str, int], ...] = (
    ("overlay", 10),
    ("opacity", 10),
    ("Preset", 5),
)


def path_complexity(path: str, deprioritize_overlays: bool = False) -> int:
    """
    Score a token path by structural simplicity.

    Args:
        path: Token path (e.g., 'theme.colors.primary')
        deprioritize_overlays: Penalize overlay/opacity/Preset variants so
            base tokens win over decorative ones

    Returns:
        10 x dots + 20 x brackets + length, plus optional penalties
    """
    score = path.count(".") * DOT_WEIGHT + path.count("[") * BRACKET_WEIGHT + len(path)

    if deprioritize_overlays:
        for needle, penalty in OVERLAY_PENALTIES:
            if needle in path:
                score += penalty

    return score


def is_simpler(candidate: str, current: str, deprioritize_overlays: bool = False) -> bool:
    """Check if candidate is strictly simpler than current (ties keep current)."""
    return path_complexity(candidate, deprioritize_overlays) < path_complexity(
        current, deprioritize_overlays
    )
