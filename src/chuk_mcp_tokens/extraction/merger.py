"""
Token merger - combines indices from several theme sources.

For each key the structurally simplest path wins. Equal scores keep the
path from the earliest input, so callers that need reproducible output
must pass inputs in a fixed order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from chuk_mcp_tokens.constants import TokenCategory
from chuk_mcp_tokens.models.config import ExtractionConfig
from chuk_mcp_tokens.models.token import ProjectTokenIndex

logger = logging.getLogger(__name__)


def merge_indices(
    indices: Iterable[ProjectTokenIndex],
    config: ExtractionConfig | None = None,
) -> ProjectTokenIndex:
    """
    Merge token indices into a new one.

    Args:
        indices: Indices in priority order (earlier wins ties)
        config: Extraction configuration (controls overlay penalties)

    Returns:
        A new index; inputs are not modified
    """
    config = config or ExtractionConfig()
    merged = ProjectTokenIndex()
    sources = 0

    for index in indices:
        sources += 1
        for category in TokenCategory:
            for key, path in index.category_map(category).items():
                current = merged.get(category, key)
                if merged.register(
                    category, key, path, deprioritize_overlays=config.deprioritize_overlays
                ) and current is not None:
                    logger.debug(
                        "Merge: %s key %r now %s (was %s)", category.value, key, path, current
                    )

    logger.debug("Merged %d token indices: %s", sources, merged.summary())
    return merged
