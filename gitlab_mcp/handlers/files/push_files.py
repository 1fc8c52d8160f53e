"""MCP handler for push_files (delegates to GitLabService)."""

from __future__ import annotations

import asyncio

from mcp.types import CallToolResult, Tool

from ...core.arguments import author_options, get_list, missing, require_string
from ...core.envelope import error_result, from_service_result
from ...services import GitLabService

# =============================================================================
# Tool Definition
# =============================================================================

TOOL_DEFINITION = Tool(
    name="push_files",
    description="Push multiple files to a GitLab repository in a single commit",
    inputSchema={
        "type": "object",
        "properties": {
            "project_id": {
                "type": "string",
                "description": "Project ID or path"
            },
            "branch": {
                "type": "string",
                "description": "Branch to push to"
            },
            "commit_message": {
                "type": "string",
                "description": "Commit message"
            },
            "files": {
                "type": "array",
                "description": "Array of file objects with 'path' and 'content' fields",
                "items": {
                    "type": "object",
                    "properties": {
                        "path": {"type": "string"},
                        "content": {"type": "string"}
                    },
                    "required": ["path", "content"]
                }
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
        "required": ["project_id", "branch", "commit_message", "files"]
    }
)

FILES_REQUIRED = "files is required and must be a non-empty array"
FILE_NOT_OBJECT = "each file must be an object with 'path' and 'content' fields"
FILE_MISSING_PATH = "each file must have a 'path' field"
FILE_MISSING_CONTENT = "each file must have a 'content' field"

# =============================================================================
# Handler
# =============================================================================

async def handle(arguments: dict, service: GitLabService) -> CallToolResult:
    """
    Commit several files to one branch in a single commit.

    Every entry is validated before anything is sent; a malformed entry
    fails the whole call.
    """

    project_id, ok = require_string(arguments, "project_id")
    if not ok:
        return error_result(missing("project_id"))
    branch, ok = require_string(arguments, "branch")
    if not ok:
        return error_result(missing("branch"))
    commit_message, ok = require_string(arguments, "commit_message")
    if not ok:
        return error_result(missing("commit_message"))

    entries = get_list(arguments, "files")
    if not entries:
        return error_result(FILES_REQUIRED)

    files, error = parse_file_entries(entries)
    if error:
        return error_result(error)

    options = {
        "branch": branch,
        "commit_message": commit_message,
    }
    options.update(author_options(arguments))

    result = await asyncio.to_thread(service.push_files, project_id, files, options)
    return from_service_result(result)


# =============================================================================
# Helpers
# =============================================================================

def parse_file_entries(entries: list) -> tuple[list[tuple[str, str]], str | None]:
    """Validate file entries into (path, content) pairs, or return the first error."""
    files = []
    for entry in entries:
        if not isinstance(entry, dict):
            return [], FILE_NOT_OBJECT

        path = entry.get("path")
        if not isinstance(path, str) or not path:
            return [], FILE_MISSING_PATH

        content = entry.get("content")
        if not isinstance(content, str):
            return [], FILE_MISSING_CONTENT

        files.append((path, content))
    return files, None
