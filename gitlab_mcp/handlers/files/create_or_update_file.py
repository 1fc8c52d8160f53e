"""MCP handler for create_or_update_file (delegates to GitLabService)."""

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
    name="create_or_update_file",
    description="Create or update a file in a GitLab repository",
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
            "branch": {
                "type": "string",
                "description": "Branch name to commit to"
            },
            "content": {
                "type": "string",
                "description": "File content"
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
        "required": ["project_id", "file_path", "branch", "content", "commit_message"]
    }
)

# =============================================================================
# Handler
# =============================================================================

async def handle(arguments: dict, service: GitLabService) -> CallToolResult:
    """
    Write one file to a branch.

    The service reads the file first: update when it exists on the branch,
    create otherwise. The result's action field says which one ran.
    """

    project_id, ok = require_string(arguments, "project_id")
    if not ok:
        return error_result(missing("project_id"))
    file_path, ok = require_string(arguments, "file_path")
    if not ok:
        return error_result(missing("file_path"))
    branch, ok = require_string(arguments, "branch")
    if not ok:
        return error_result(missing("branch"))

    # Empty content is a valid (empty) file
    content = arguments.get("content")
    if not isinstance(content, str):
        return error_result(missing("content"))

    commit_message, ok = require_string(arguments, "commit_message")
    if not ok:
        return error_result(missing("commit_message"))

    options = {
        "branch": branch,
        "content": content,
        "commit_message": commit_message,
    }
    options.update(author_options(arguments))

    result = await asyncio.to_thread(
        service.create_or_update_file, project_id, file_path, options
    )
    return from_service_result(result)

