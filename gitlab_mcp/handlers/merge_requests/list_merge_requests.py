"""MCP handler for list_merge_requests (delegates to GitLabService)."""

from __future__ import annotations

import asyncio

from mcp.types import CallToolResult, Tool

from ...constants import DEFAULT_PER_PAGE, DEFAULT_STATE
from ...core.arguments import get_int, get_string, missing, require_string
from ...core.envelope import error_result, from_service_result
from ...services import GitLabService

# =============================================================================
# Tool Definition
# =============================================================================

TOOL_DEFINITION = Tool(
    name="list_merge_requests",
    description="List merge requests in a GitLab project",
    inputSchema={
        "type": "object",
        "properties": {
            "project_id": {
                "type": "string",
                "description": "Project ID or path"
            },
            "state": {
                "type": "string",
                "description": "Filter by state: opened, closed, merged, all (default: opened)"
            },
            "per_page": {
                "type": "number",
                "description": "Number of merge requests per page (default: 20)"
            }
        },
        "required": ["project_id"]
    }
)

# =============================================================================
# Handler
# =============================================================================

async def handle(arguments: dict, service: GitLabService) -> CallToolResult:
    """List one page of merge requests filtered by state."""

    project_id, ok = require_string(arguments, "project_id")
    if not ok:
        return error_result(missing("project_id"))

    options = {
        "state": get_string(arguments, "state", DEFAULT_STATE),
        "per_page": get_int(arguments, "per_page", DEFAULT_PER_PAGE),
    }

    result = await asyncio.to_thread(service.list_merge_requests, project_id, options)
    return from_service_result(result)
