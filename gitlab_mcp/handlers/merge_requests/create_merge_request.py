"""MCP handler for create_merge_request (delegates to GitLabService)."""

from __future__ import annotations

import asyncio

from mcp.types import CallToolResult, Tool

from ...core.arguments import (
    get_bool,
    get_string,
    missing,
    parse_int_list,
    require_string,
    split_labels,
)
from ...core.envelope import error_result, from_service_result
from ...services import GitLabService

# =============================================================================
# Tool Definition
# =============================================================================

TOOL_DEFINITION = Tool(
    name="create_merge_request",
    description="Create a new merge request in a GitLab project",
    inputSchema={
        "type": "object",
        "properties": {
            "project_id": {
                "type": "string",
                "description": "Project ID or path"
            },
            "source_branch": {
                "type": "string",
                "description": "Source branch name"
            },
            "target_branch": {
                "type": "string",
                "description": "Target branch name (e.g., main, master)"
            },
            "title": {
                "type": "string",
                "description": "Merge request title"
            },
            "description": {
                "type": "string",
                "description": "Merge request description (supports Markdown)"
            },
            "remove_source_branch": {
                "type": "boolean",
                "description": "Remove source branch after merge (default: false)"
            },
            "squash": {
                "type": "boolean",
                "description": "Squash commits on merge (default: false)"
            },
            "labels": {
                "type": "string",
                "description": "Comma-separated list of labels"
            },
            "assignee_ids": {
                "type": "string",
                "description": "Comma-separated list of assignee user IDs"
            }
        },
        "required": ["project_id", "source_branch", "target_branch", "title"]
    }
)

# Checked in this order; the first missing one is reported
REQUIRED_FIELDS = ("project_id", "source_branch", "target_branch", "title")

# =============================================================================
# Handler
# =============================================================================

async def handle(arguments: dict, service: GitLabService) -> CallToolResult:
    """Open a merge request from source_branch into target_branch."""

    values = {}
    for field in REQUIRED_FIELDS:
        value, ok = require_string(arguments, field)
        if not ok:
            return error_result(missing(field))
        values[field] = value

    project_id = values.pop("project_id")
    options = dict(values)

    description = get_string(arguments, "description")
    if description:
        options["description"] = description

    # Booleans are sent whenever given, false included
    remove_source_branch = get_bool(arguments, "remove_source_branch")
    if remove_source_branch is not None:
        options["remove_source_branch"] = remove_source_branch

    squash = get_bool(arguments, "squash")
    if squash is not None:
        options["squash"] = squash

    labels = get_string(arguments, "labels")
    if labels:
        options["labels"] = split_labels(labels)

    assignee_ids = parse_int_list(get_string(arguments, "assignee_ids"))
    if assignee_ids:
        options["assignee_ids"] = assignee_ids

    result = await asyncio.to_thread(service.create_merge_request, project_id, options)
    return from_service_result(result)
