"""MCP handler for list_branches (delegates to GitLabService)."""

from __future__ import annotations

import asyncio

from mcp.types import CallToolResult, Tool

from ...constants import DEFAULT_PER_PAGE
from ...core.arguments import get_int, get_string, missing, require_string
from ...core.envelope import error_result, from_service_result
from ...services import GitLabService

# =============================================================================
# Tool Definition
# =============================================================================

TOOL_DEFINITION = Tool(
    name="list_branches",
    description="List branches in a GitLab repository",
    inputSchema={
        "type": "object",
        "properties": {
            "project_id": {
                "type": "string",
                "description": "Project ID or path"
            },
            "search": {
                "type": "string",
                "description": "Search branches by name"
            },
            "per_page": {
                "type": "number",
                "description": "Number of branches per page (default: 20)"
            }
        },
        "required": ["project_id"]
    }
)

# =============================================================================
# Handler
# =============================================================================

async def handle(arguments: dict, service: GitLabService) -> CallToolResult:
    """List one page of branches, optionally filtered by name."""

    project_id, ok = require_string(arguments, "project_id")
    if not ok:
        return error_result(missing("project_id"))

    options = {"per_page": get_int(arguments, "per_page", DEFAULT_PER_PAGE)}

    search = get_string(arguments, "search")
    if search:
        options["search"] = search

    result = await asyncio.to_thread(service.list_branches, project_id, options)
    return from_service_result(result)
