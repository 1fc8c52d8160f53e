"""Registry for branch MCP tool definitions and handlers."""

from .create_branch import (
    TOOL_DEFINITION as CREATE_BRANCH_TOOL,
    handle as handle_create_branch,
)
from .list_branches import (
    TOOL_DEFINITION as LIST_BRANCHES_TOOL,
    handle as handle_list_branches,
)

# All branch tool definitions
TOOLS = [
    CREATE_BRANCH_TOOL,
    LIST_BRANCHES_TOOL,
]

# Tool name to handler mapping
HANDLERS = {
    "create_branch": handle_create_branch,
    "list_branches": handle_list_branches,
}


__all__ = [
    # Tool definitions
    "TOOLS",
    "CREATE_BRANCH_TOOL",
    "LIST_BRANCHES_TOOL",
    # Handlers
    "HANDLERS",
    "handle_create_branch",
    "handle_list_branches",
]
