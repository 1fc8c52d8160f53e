"""
MCP server entrypoint for gitlab-mcp.

This module is intentionally thin:
- loads configuration and builds the shared GitLab service
- registers tools (from handlers)
- routes tool calls to handlers
"""


from __future__ import annotations

import asyncio
import logging
import sys

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, TextContent, Tool

from .config import ConfigError, GitLabConfig
from .constants import SERVER_NAME
from .core.envelope import error_result, result_text
from .handlers import ALL_HANDLERS, ALL_TOOLS
from .services import GitLabService, create_gitlab_service

# Configure logging (stderr; stdout belongs to the stdio transport)
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class ToolCallError(Exception):
    """Raised from call_tool so the SDK returns the message with isError set."""


# =============================================================================
# Tool Router
# =============================================================================

async def dispatch(name: str, arguments: dict | None, service: GitLabService) -> CallToolResult:
    """Route a tool call to its handler and return the envelope."""
    handler = ALL_HANDLERS.get(name)

    if handler is None:
        return error_result(f"Unknown tool: {name}")

    return await handler(arguments or {}, service)


# =============================================================================
# Tool Registration
# =============================================================================

def create_server(service: GitLabService) -> Server:
    """Create the MCP server with every tool bound to the given service."""
    server = Server(SERVER_NAME)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        """List all available tools."""
        return ALL_TOOLS

    # Handlers report missing arguments themselves, with field-specific messages
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict) -> list[TextContent]:
        """Route tool calls to appropriate handlers."""
        logger.info(f"Tool called: {name}")

        result = await dispatch(name, arguments, service)

        if result.isError:
            raise ToolCallError(result_text(result))

        return result.content

    return server


# =============================================================================
# Entry Point
# =============================================================================

async def run_server(service: GitLabService) -> None:
    """Run the MCP server over stdio until the client disconnects."""
    server = create_server(service)

    logger.info("Starting GitLab MCP Server...")
    logger.info(f"Registered {len(ALL_TOOLS)} tools: {[t.name for t in ALL_TOOLS]}")

    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options()
        )


def main():
    """Entry point."""
    try:
        config = GitLabConfig.from_env()
    except ConfigError as e:
        logger.error(str(e))
        sys.exit(1)

    logging.getLogger().setLevel(config.log_level)
    logger.info(f"Using GitLab instance {config.url}")

    try:
        service = create_gitlab_service(config)
    except Exception as e:
        logger.error(f"Failed to create GitLab client: {e}")
        sys.exit(1)

    try:
        asyncio.run(run_server(service))
    except KeyboardInterrupt:
        logger.info("Server stopped")
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
