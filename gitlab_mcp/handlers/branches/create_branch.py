"""MCP handler for create_branch (delegates to GitLabService)."""

from __future__ import annotations

import asyncio

from mcp.types import CallToolResult, Tool

from ...core.arguments import missing, require_string
from ...core.envelope import error_result, from_service_result
from ...services import GitLabService

# =============================================================================
# Tool Definition
# =============================================================================

TOOL_DEFINITION = Tool(
    name="create_branch",
    description="Create a new branch in a GitLab repository",
    inputSchema={
        "type": "object",
        "properties": {
            "project_id": {
                "type": "string",
                "description": "Project ID or path"
            },
            "branch": {
                "type": "string",
                "description": "Name of the new branch"
            },
            "ref": {
                "type": "string",
                "description": "Branch name or commit SHA to create branch from"
            }
        },
        "required": ["project_id", "branch", "ref"]
    }
)

# =============================================================================
# Handler
# =============================================================================

async def handle(arguments: dict, service: GitLabService) -> CallToolResult:
    """Create a branch from an existing branch or commit."""

    project_id, ok = require_string(arguments, "project_id")
    if not ok:
        return error_result(missing("project_id"))
    branch, ok = require_string(arguments, "branch")
    if not ok:
        return error_result(missing("branch"))
    ref, ok = require_string(arguments, "ref")
    if not ok:
        return error_result(missing("ref"))

    options = {"branch": branch, "ref": ref}

    result = await asyncio.to_thread(service.create_branch, project_id, options)
    return from_service_result(result)
