"""MCP handler for create_issue (delegates to GitLabService)."""

from __future__ import annotations

import asyncio

from mcp.types import CallToolResult, Tool

from ...core.arguments import get_string, missing, require_string, split_labels
from ...core.envelope import error_result, from_service_result
from ...services import GitLabService

# =============================================================================
# Tool Definition
# =============================================================================

TOOL_DEFINITION = Tool(
    name="create_issue",
    description="Create a new issue in a GitLab project",
    inputSchema={
        "type": "object",
        "properties": {
            "project_id": {
                "type": "string",
                "description": "Project ID or path"
            },
            "title": {
                "type": "string",
                "description": "Issue title"
            },
            "description": {
                "type": "string",
                "description": "Issue description (supports Markdown)"
            },
            "labels": {
                "type": "string",
                "description": "Comma-separated list of labels"
            }
        },
        "required": ["project_id", "title"]
    }
)

# =============================================================================
# Handler
# =============================================================================

async def handle(arguments: dict, service: GitLabService) -> CallToolResult:
    """Create an issue and return its iid, title and URL."""

    project_id, ok = require_string(arguments, "project_id")
    if not ok:
        return error_result(missing("project_id"))
    title, ok = require_string(arguments, "title")
    if not ok:
        return error_result(missing("title"))

    options = {"title": title}

    description = get_string(arguments, "description")
    if description:
        options["description"] = description

    labels = get_string(arguments, "labels")
    if labels:
        options["labels"] = split_labels(labels)

    result = await asyncio.to_thread(service.create_issue, project_id, options)
    return from_service_result(result)
