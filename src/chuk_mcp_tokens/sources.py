"""
Theme sources - locating, reading, and extracting theme files.

Theme files are parsed data trees (JSON or YAML). Each file is extracted
into its own index in a worker thread; the per-file indices are merged
once every extraction has finished.
"""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml

from chuk_mcp_tokens.constants import THEME_DIRS, THEME_FILE_NAMES, ErrorMessages
from chuk_mcp_tokens.errors import ThemeSourceError
from chuk_mcp_tokens.extraction import ThemeWalker, merge_indices
from chuk_mcp_tokens.models.config import ExtractionConfig
from chuk_mcp_tokens.models.token import ProjectTokenIndex

logger = logging.getLogger(__name__)

# Export wrappers picked in this order when present at the root
EXPORT_KEYS = ("default", "theme")


class ThemeSourceLoader:
    """Reads theme trees from JSON and YAML files."""

    SUPPORTED_SUFFIXES = (".json", ".yaml", ".yml")

    def load(self, path: Path | str) -> dict[str, Any]:
        """
        Load a theme tree.

        A root whose only key is a `default` or `theme` mapping is unwrapped
        to it. A wrapper with sibling keys is kept as part of the tree.

        Args:
            path: Theme file path

        Returns:
            The theme tree

        Raises:
            ThemeSourceError: If the file is missing, unparseable, or not a mapping
        """
        path = Path(path)
        if not path.is_file():
            raise ThemeSourceError(ErrorMessages.THEME_NOT_FOUND.format(path=path), str(path))

        suffix = path.suffix.lower()
        if suffix not in self.SUPPORTED_SUFFIXES:
            raise ThemeSourceError(
                ErrorMessages.UNSUPPORTED_THEME_FORMAT.format(path=path), str(path)
            )

        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f) if suffix == ".json" else yaml.safe_load(f)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise ThemeSourceError(
                ErrorMessages.THEME_UNREADABLE.format(path=path, error=e), str(path)
            ) from e

        tree = self._unwrap(data)
        if not isinstance(tree, dict):
            raise ThemeSourceError(ErrorMessages.THEME_NOT_MAPPING.format(path=path), str(path))
        return tree

    def _unwrap(self, data: Any) -> Any:
        # Only a lone export wrapper is unwrapped; siblings keep the whole tree
        if isinstance(data, dict) and len(data) == 1:
            key, value = next(iter(data.items()))
            if key in EXPORT_KEYS and isinstance(value, dict):
                return value
        return data


def find_theme_files(project_root: Path | str) -> list[Path]:
    """
    Find theme files in the conventional locations of a project.

    Directories are probed in THEME_DIRS order, file names in
    THEME_FILE_NAMES order.

    Args:
        project_root: Project directory

    Returns:
        Existing theme files, without duplicates
    """
    root = Path(project_root)
    found: dict[Path, None] = {}
    for directory in THEME_DIRS:
        for name in THEME_FILE_NAMES:
            candidate = root / directory / name
            if candidate.is_file():
                found[candidate.resolve()] = None
    return list(found)


def extract_source(
    path: Path | str,
    config: ExtractionConfig | None = None,
    loader: ThemeSourceLoader | None = None,
) -> ProjectTokenIndex:
    """
    Load one theme file and build its token index.

    Raises:
        ThemeSourceError: If the file cannot be loaded
    """
    loader = loader or ThemeSourceLoader()
    tree = loader.load(path)
    logger.info("Extracting tokens from %s", path)
    return ThemeWalker(config).extract(tree)


async def extract_sources(
    paths: Iterable[Path | str],
    config: ExtractionConfig | None = None,
    loader: ThemeSourceLoader | None = None,
) -> ProjectTokenIndex:
    """
    Extract several theme files concurrently and merge the results.

    Indices are merged in the order of `paths`, whatever order the
    extractions finish in.

    Args:
        paths: Theme files, in priority order
        config: Extraction configuration
        loader: Theme source loader

    Returns:
        The merged index

    Raises:
        ThemeSourceError: If any file cannot be loaded
    """
    config = config or ExtractionConfig()
    loader = loader or ThemeSourceLoader()
    paths = list(paths)

    indices = await asyncio.gather(
        *(asyncio.to_thread(extract_source, path, config, loader) for path in paths)
    )
    return merge_indices(indices, config)
