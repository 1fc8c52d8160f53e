"""Registry for merge request MCP tool definitions and handlers."""

from .create_merge_request import (
    TOOL_DEFINITION as CREATE_MERGE_REQUEST_TOOL,
    handle as handle_create_merge_request,
)
from .list_merge_requests import (
    TOOL_DEFINITION as LIST_MERGE_REQUESTS_TOOL,
    handle as handle_list_merge_requests,
)

# All merge request tool definitions
TOOLS = [
    LIST_MERGE_REQUESTS_TOOL,
    CREATE_MERGE_REQUEST_TOOL,
]

# Tool name to handler mapping
HANDLERS = {
    "list_merge_requests": handle_list_merge_requests,
    "create_merge_request": handle_create_merge_request,
}


__all__ = [
    # Tool definitions
    "TOOLS",
    "LIST_MERGE_REQUESTS_TOOL",
    "CREATE_MERGE_REQUEST_TOOL",
    # Handlers
    "HANDLERS",
    "handle_list_merge_requests",
    "handle_create_merge_request",
]
