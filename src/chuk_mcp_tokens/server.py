#!/usr/bin/env python3
"""
Command line entry point for the CHUK Tokens MCP Server.

The server extracts token indices from a project's JSON or YAML theme files
and resolves design values (colors, spacing, radii, shadows, text styles)
to theme token paths. Indices live in memory for the lifetime of the
process; project configs are read from ./tokens-config in the
working directory, falling back to the bundled library configs.

Usage:
    chuk-mcp-tokens                      # stdio, for MCP clients
    chuk-mcp-tokens --transport http --port 8000
    chuk-mcp-tokens --debug              # log skipped theme nodes and merges
"""

import argparse
import asyncio
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main() -> None:
    """Run the server on the transport chosen on the command line."""
    parser = argparse.ArgumentParser(description="CHUK Tokens MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    # Importing builds the server and registers its tools
    from chuk_mcp_tokens.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting CHUK Tokens MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Tokens MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
