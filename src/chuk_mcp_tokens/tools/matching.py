"""
Matching tools - MCP tools for resolving design values to token paths.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_tokens.config import ConfigLoader
from chuk_mcp_tokens.constants import ErrorMessages
from chuk_mcp_tokens.errors import TokensError
from chuk_mcp_tokens.index_store import IndexStore
from chuk_mcp_tokens.matching import resolve_values
from chuk_mcp_tokens.models.values import DesignValue

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_matching_tools(
    mcp: ChukMCPServer,
    store: IndexStore,
    config_loader: ConfigLoader,
) -> dict[str, Any]:
    """
    Register matching tools with the MCP server.

    Args:
        mcp: The MCP server instance
        store: The index store
        config_loader: The config loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_match_values(
        name: str,
        values: list[dict[str, Any]],
        has_project_theme: bool | None = None,
        tolerance: bool = True,
        config: str | None = None,
    ) -> str:
        """
        Resolve design values to theme token paths.

        Each value is a record with a category and its fields, e.g.
        {"category": "color", "hex": "#3b82f6"} or
        {"category": "shadow", "offsetY": 4, "blur": 6, "color": "#0000001A"}.
        Unmatched colors, spacing and radii are listed so they can be
        reviewed; unmatched colors come with the nearest theme color.

        Args:
            name: Index to resolve against
            values: Design value records
            has_project_theme: Allow assumed theme.shadows.* paths
                (defaults to whether the index came from theme files)
            tolerance: Retry text styles with nearby sizes and weights
            config: Config name controlling matching (defaults to the
                config the index was extracted with)

        Returns:
            JSON string with per-value results, mappings, and unmapped values

        Example:
            tokens_match_values(
                name="app",
                values=[{"category": "spacing", "value": 16}]
            )
        """
        try:
            stored = await store.get(name)
            if stored is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.INDEX_NOT_FOUND.format(name=name)}
                )

            tokens_config = config_loader.get_config(config or stored.config_name)
            design_values = [DesignValue.parse(raw) for raw in values]
            if has_project_theme is None:
                has_project_theme = stored.has_project_theme

            resolution = resolve_values(
                design_values,
                stored.index,
                has_project_theme=has_project_theme,
                config=tokens_config.matching,
                tolerance=tolerance,
            )
            suggestions = resolution.unmapped.suggestions(
                stored.index, tokens_config.matching.color_suggestion_threshold
            )

            return json.dumps(
                {
                    "status": "success",
                    "name": name,
                    "has_project_theme": has_project_theme,
                    **resolution.to_dict(),
                    "suggestions": suggestions,
                }
            )
        except TokensError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to match values")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_match_values"] = tokens_match_values

    return tools
