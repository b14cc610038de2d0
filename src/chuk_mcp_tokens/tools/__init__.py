"""
MCP tool implementations.

Tools are organized by domain:
- extraction - Theme discovery, extraction, and index inspection
- matching - Resolving design values against an index
"""

from chuk_mcp_tokens.tools.extraction import register_extraction_tools
from chuk_mcp_tokens.tools.matching import register_matching_tools

__all__ = [
    "register_extraction_tools",
    "register_matching_tools",
]
