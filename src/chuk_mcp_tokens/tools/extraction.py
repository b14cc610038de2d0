"""
Extraction tools - MCP tools for building and inspecting token indices.

Tools for finding theme files, extracting them into a named index,
and looking at what an index contains.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from chuk_mcp_tokens.config import ConfigLoader
from chuk_mcp_tokens.constants import (
    CATEGORY_FIELDS,
    ErrorMessages,
    SuccessMessages,
    TokenCategory,
)
from chuk_mcp_tokens.core.paths import simplify_path
from chuk_mcp_tokens.errors import TokensError
from chuk_mcp_tokens.index_store import IndexStore
from chuk_mcp_tokens.sources import extract_sources, find_theme_files

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_extraction_tools(
    mcp: ChukMCPServer,
    store: IndexStore,
    config_loader: ConfigLoader,
) -> dict[str, Any]:
    """
    Register extraction tools with the MCP server.

    Args:
        mcp: The MCP server instance
        store: The index store
        config_loader: The config loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_find_theme_files(project_root: str = ".") -> str:
        """
        Find theme files in a project.

        Looks for theme.json, theme.yaml, tokens.json and similar files
        in the usual style directories (src/styles/theme, src/theme, ...).

        Args:
            project_root: Project directory to search

        Returns:
            JSON string with the theme file paths found

        Example:
            tokens_find_theme_files(project_root="./my-app")
        """
        try:
            files = find_theme_files(project_root)
            return json.dumps(
                {
                    "status": "success",
                    "files": [str(f) for f in files],
                    "count": len(files),
                }
            )
        except Exception as e:
            logger.exception("Failed to find theme files")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_find_theme_files"] = tokens_find_theme_files

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_extract_theme(
        name: str,
        theme_paths: list[str] | None = None,
        project_root: str | None = None,
        config: str = "default",
    ) -> str:
        """
        Extract theme files into a named token index.

        Each file is walked for colors, spacing, radii, shadows and text
        styles; the per-file results are merged keeping the simplest
        token path for every value. Without theme_paths, theme files are
        discovered under project_root (or the working directory).

        Args:
            name: Name to store the index under
            theme_paths: Theme files in priority order
            project_root: Project to search when theme_paths is omitted
            config: Config name controlling extraction

        Returns:
            JSON string with the index summary

        Example:
            tokens_extract_theme(name="app", theme_paths=["src/theme/theme.json"])
        """
        try:
            tokens_config = config_loader.get_config(config)
            if theme_paths:
                paths = [Path(p) for p in theme_paths]
            else:
                paths = find_theme_files(project_root or Path.cwd())

            index = await extract_sources(paths, tokens_config.extraction)
            stored = await store.put(
                name, index, sources=[str(p) for p in paths], config_name=config
            )

            result: dict[str, Any] = {
                "status": "success",
                "name": name,
                "sources": stored.sources,
                "summary": index.summary(),
                "has_project_theme": stored.has_project_theme,
                "message": SuccessMessages.INDEX_EXTRACTED.format(name=name, count=len(paths)),
            }
            if not paths:
                result["warning"] = "No theme files found; the index is empty."
            return json.dumps(result)
        except TokensError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to extract theme")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_extract_theme"] = tokens_extract_theme

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_describe_index(name: str, category: str | None = None) -> str:
        """
        Show the entries of a token index.

        Args:
            name: Index name
            category: Only this category (color, spacing, radii, shadow, typography)

        Returns:
            JSON string with normalized value -> token path maps

        Example:
            tokens_describe_index(name="app", category="color")
        """
        try:
            stored = await store.get(name)
            if stored is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.INDEX_NOT_FOUND.format(name=name)}
                )

            entries = stored.index.to_dict()
            if category is not None:
                valid = [c.value for c in TokenCategory]
                if category not in valid:
                    return json.dumps(
                        {
                            "status": "error",
                            "message": ErrorMessages.UNKNOWN_CATEGORY.format(
                                category=category, valid=", ".join(valid)
                            ),
                        }
                    )
                field = CATEGORY_FIELDS[TokenCategory(category)]
                entries = {field: entries[field]}

            return json.dumps(
                {
                    "status": "success",
                    "name": name,
                    "sources": stored.sources,
                    "config": stored.config_name,
                    "summary": stored.index.summary(),
                    "entries": entries,
                }
            )
        except Exception as e:
            logger.exception("Failed to describe index")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_describe_index"] = tokens_describe_index

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_list_indices() -> str:
        """
        List stored token indices.

        Returns:
            JSON string with index summaries

        Example:
            tokens_list_indices()
        """
        try:
            indices = await store.list()
            return json.dumps(
                {
                    "status": "success",
                    "indices": [
                        {
                            "name": s.name,
                            "sources": s.sources,
                            "keys": s.index.count(),
                            "created": s.created.isoformat(),
                        }
                        for s in indices
                    ],
                    "count": len(indices),
                }
            )
        except Exception as e:
            logger.exception("Failed to list indices")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_list_indices"] = tokens_list_indices

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_delete_index(name: str) -> str:
        """
        Delete a stored token index.

        Args:
            name: Index name

        Returns:
            JSON string with deletion status

        Example:
            tokens_delete_index(name="app")
        """
        try:
            if not await store.delete(name):
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.INDEX_NOT_FOUND.format(name=name)}
                )
            return json.dumps(
                {"status": "success", "message": SuccessMessages.INDEX_DELETED.format(name=name)}
            )
        except Exception as e:
            logger.exception("Failed to delete index")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_delete_index"] = tokens_delete_index

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_simplify_path(path: str, config: str = "default") -> str:
        """
        Reduce a token path to its canonical theme.* form.

        Wrapper segments such as tokens, palette and masterColors are
        removed.

        Args:
            path: Token path, e.g. "tokens.masterColors.blue500"
            config: Config name supplying the wrapper segment list

        Returns:
            JSON string with the simplified path

        Example:
            tokens_simplify_path(path="tokens.masterColors.blue500")
        """
        try:
            tokens_config = config_loader.get_config(config)
            simplified = simplify_path(path, tokens_config.extraction.path_denylist)
            return json.dumps({"status": "success", "path": path, "simplified": simplified})
        except TokensError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to simplify path")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_simplify_path"] = tokens_simplify_path

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_list_configs() -> str:
        """
        List available tokens configs.

        Returns:
            JSON string with config names

        Example:
            tokens_list_configs()
        """
        try:
            names = config_loader.list_configs()
            return json.dumps({"status": "success", "configs": names, "count": len(names)})
        except Exception as e:
            logger.exception("Failed to list configs")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_list_configs"] = tokens_list_configs

    return tools
