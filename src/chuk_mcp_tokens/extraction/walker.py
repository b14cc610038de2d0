"""
Theme walker - turns an arbitrary theme tree into a ProjectTokenIndex.

The tree shape is unknown: tokens may sit at any depth, under any wrapper
keys. Leaves are classified one by one; objects that are themselves a
shadow or a text style are indexed whole and not descended into.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any

from chuk_mcp_tokens.constants import TokenCategory
from chuk_mcp_tokens.core.paths import child_path, simplify_path
from chuk_mcp_tokens.extraction.classifier import to_theme_token
from chuk_mcp_tokens.extraction.keys import index_keys
from chuk_mcp_tokens.models.config import ExtractionConfig
from chuk_mcp_tokens.models.token import ProjectTokenIndex, ThemeToken

logger = logging.getLogger(__name__)

COMPOSITE_CATEGORIES = frozenset({TokenCategory.SHADOW, TokenCategory.TYPOGRAPHY})


def iter_tokens(node: Any, path: str, config: ExtractionConfig) -> Iterator[ThemeToken]:
    """
    Yield every classifiable token under a node, depth first.

    Args:
        node: Theme subtree (mapping or leaf)
        path: Path of the node
        config: Extraction configuration

    Yields:
        ThemeToken for each classified leaf or composite object
    """
    if isinstance(node, Mapping):
        token = to_theme_token(path, node, config)
        if token is not None and token.category in COMPOSITE_CATEGORIES:
            yield token
            return
        for key, child in node.items():
            yield from iter_tokens(child, child_path(path, str(key)), config)
        return

    token = to_theme_token(path, node, config)
    if token is None:
        logger.debug("Skipping unclassified value at %s (%s)", path, type(node).__name__)
        return
    yield token


def register_token(index: ProjectTokenIndex, token: ThemeToken, config: ExtractionConfig) -> int:
    """
    Add a token's keys to an index.

    All keys of one token (a typography token has several) are written in
    a single update.

    Returns:
        Number of keys written
    """
    path = simplify_path(token.path, config.path_denylist) if config.simplify_paths else token.path
    written = index.register_many(
        token.category,
        index_keys(token),
        path,
        deprioritize_overlays=config.deprioritize_overlays,
    )
    if not written:
        logger.debug("Kept simpler existing path over %s", path)
    return written


def walk(node: Any, path: str, index: ProjectTokenIndex, config: ExtractionConfig) -> None:
    """
    Recursively visit a theme tree and register its tokens into an index.

    Args:
        node: Theme subtree
        path: Path of the subtree
        index: Index to register into
        config: Extraction configuration
    """
    for token in iter_tokens(node, path, config):
        register_token(index, token, config)


class ThemeWalker:
    """
    Builds token indices from parsed theme trees.

    A walker holds only configuration; every extract() call builds a fresh
    index, so one walker can serve concurrent runs.
    """

    def __init__(self, config: ExtractionConfig | None = None):
        """
        Initialize the walker.

        Args:
            config: Extraction configuration (defaults if omitted)
        """
        self.config = config or ExtractionConfig()

    def tokens(self, tree: Any, root_path: str | None = None) -> list[ThemeToken]:
        """List the tokens of a tree without indexing them."""
        root = self.config.root_path if root_path is None else root_path
        return list(iter_tokens(tree, root, self.config))

    def extract(self, tree: Any, root_path: str | None = None) -> ProjectTokenIndex:
        """
        Build a token index from a theme tree.

        Args:
            tree: Parsed theme tree
            root_path: Path of the tree root (defaults to config.root_path)

        Returns:
            A new ProjectTokenIndex
        """
        root = self.config.root_path if root_path is None else root_path
        index = ProjectTokenIndex()
        walk(tree, root, index, self.config)
        logger.info("Extracted token index: %s", index.summary())
        return index
