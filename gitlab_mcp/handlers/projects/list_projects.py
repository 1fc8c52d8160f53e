"""MCP handler for list_projects (delegates to GitLabService)."""

from __future__ import annotations

import asyncio

from mcp.types import CallToolResult, Tool

from ...constants import DEFAULT_PAGE, DEFAULT_PER_PAGE
from ...core.arguments import get_int
from ...core.envelope import from_service_result
from ...services import GitLabService

# =============================================================================
# Tool Definition
# =============================================================================

TOOL_DEFINITION = Tool(
    name="list_projects",
    description="List GitLab projects accessible to the user",
    inputSchema={
        "type": "object",
        "properties": {
            "per_page": {
                "type": "number",
                "description": "Number of projects per page (default: 20, max: 100)"
            },
            "page": {
                "type": "number",
                "description": "Page number (default: 1)"
            }
        }
    }
)

# =============================================================================
# Handler
# =============================================================================

async def handle(arguments: dict, service: GitLabService) -> CallToolResult:
    """List one page of projects the token's user is a member of."""

    options = {
        "membership": True,
        "per_page": get_int(arguments, "per_page", DEFAULT_PER_PAGE),
        "page": get_int(arguments, "page", DEFAULT_PAGE),
    }

    result = await asyncio.to_thread(service.list_projects, options)
    return from_service_result(result)
