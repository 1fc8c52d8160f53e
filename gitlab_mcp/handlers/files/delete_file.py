"""MCP handler for delete_file (delegates to GitLabService)."""

from __future__ import annotations

import asyncio

from mcp.types import CallToolResult, Tool

from ...core.arguments import author_options, missing, require_string
from ...core.envelope import error_result, from_service_result
from ...services import GitLabService

# =============================================================================
# Tool Definition
# =============================================================================

TOOL_DEFINITION = Tool(
    name="delete_file",
    description="Delete a file from a GitLab repository",
    inputSchema={
        "type": "object",
        "properties": {
            "project_id": {
                "type": "string",
                "description": "Project ID or path"
            },
            "file_path": {
                "type": "string",
                "description": "Path to the file to delete"
            },
            "branch": {
                "type": "string",
                "description": "Branch name to commit to"
            },
            "commit_message": {
                "type": "string",
                "description": "Commit message"
            },
            "author_email": {
                "type": "string",
                "description": "Author email for the commit"
            },
            "author_name": {
                "type": "string",
                "description": "Author name for the commit"
            }
        },
        "required": ["project_id", "file_path", "branch", "commit_message"]
    }
)

REQUIRED_FIELDS = ("project_id", "file_path", "branch", "commit_message")

# =============================================================================
# Handler
# =============================================================================

async def handle(arguments: dict, service: GitLabService) -> CallToolResult:
    """Delete a file in a new commit on the given branch."""

    values = {}
    for field in REQUIRED_FIELDS:
        value, ok = require_string(arguments, field)
        if not ok:
            return error_result(missing(field))
        values[field] = value

    options = {
        "branch": values["branch"],
        "commit_message": values["commit_message"],
    }
    options.update(author_options(arguments))

    result = await asyncio.to_thread(
        service.delete_file, values["project_id"], values["file_path"], options
    )
    return from_service_result(result)
