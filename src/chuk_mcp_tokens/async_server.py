#!/usr/bin/env python3
"""
Async Design Tokens MCP Server using chuk-mcp-server

This server resolves concrete design values (colors, spacing, corner
radii, shadows, text styles) into references to a project's existing
theme tokens, so generated UI code uses token names instead of literals.

The server provides tools for:
- Finding and extracting theme files into named token indices
- Inspecting indices and canonical token paths
- Resolving batches of design values and reporting unmapped ones
"""

import logging
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_tokens.config import ConfigLoader
from chuk_mcp_tokens.index_store import IndexStore
from chuk_mcp_tokens.tools import register_extraction_tools, register_matching_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-tokens")

# Paths - use standard project structure
BASE_PATH = Path.cwd()
CONFIG_DIR = BASE_PATH / "tokens-config"
CONFIG_LIBRARY_PATH = Path(__file__).parent / "library"

# Create managers
index_store = IndexStore()
config_loader = ConfigLoader(
    library_path=CONFIG_LIBRARY_PATH,
    project_path=CONFIG_DIR,
)

# Register all tools
extraction_tools = register_extraction_tools(mcp, index_store, config_loader)
matching_tools = register_matching_tools(mcp, index_store, config_loader)

# Export tool functions for direct access
tokens_find_theme_files = extraction_tools["tokens_find_theme_files"]
tokens_extract_theme = extraction_tools["tokens_extract_theme"]
tokens_describe_index = extraction_tools["tokens_describe_index"]
tokens_list_indices = extraction_tools["tokens_list_indices"]
tokens_delete_index = extraction_tools["tokens_delete_index"]
tokens_simplify_path = extraction_tools["tokens_simplify_path"]
tokens_list_configs = extraction_tools["tokens_list_configs"]

tokens_match_values = matching_tools["tokens_match_values"]

logger.info("CHUK Tokens MCP Server initialized")
logger.info(f"  Config library: {CONFIG_LIBRARY_PATH}")
logger.info(f"  Project config dir: {CONFIG_DIR}")
