"""MCP handler for get_file (delegates to GitLabService)."""

from __future__ import annotations

import asyncio

from mcp.types import CallToolResult, Tool

from ...constants import DEFAULT_FILE_REF
from ...core.arguments import get_string, missing, require_string
from ...core.envelope import error_result, from_service_result
from ...services import GitLabService

# =============================================================================
# Tool Definition
# =============================================================================

TOOL_DEFINITION = Tool(
    name="get_file",
    description="Get contents of a file from a GitLab repository",
    inputSchema={
        "type": "object",
        "properties": {
            "project_id": {
                "type": "string",
                "description": "Project ID or path"
            },
            "file_path": {
                "type": "string",
                "description": "Path to the file in the repository"
            },
            "ref": {
                "type": "string",
                "description": "Branch, tag, or commit SHA (default: default branch)"
            }
        },
        "required": ["project_id", "file_path"]
    }
)

# =============================================================================
# Handler
# =============================================================================

async def handle(arguments: dict, service: GitLabService) -> CallToolResult:
    """Fetch a file and return its metadata plus decoded text content."""

    project_id, ok = require_string(arguments, "project_id")
    if not ok:
        return error_result(missing("project_id"))
    file_path, ok = require_string(arguments, "file_path")
    if not ok:
        return error_result(missing("file_path"))

    ref = get_string(arguments, "ref") or DEFAULT_FILE_REF

    result = await asyncio.to_thread(service.get_file, project_id, file_path, ref)
    return from_service_result(result)
