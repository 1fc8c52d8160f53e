"""Registry for issue MCP tool definitions and handlers."""

from .create_issue import (
    TOOL_DEFINITION as CREATE_ISSUE_TOOL,
    handle as handle_create_issue,
)
from .list_issues import (
    TOOL_DEFINITION as LIST_ISSUES_TOOL,
    handle as handle_list_issues,
)

# All issue tool definitions
TOOLS = [
    LIST_ISSUES_TOOL,
    CREATE_ISSUE_TOOL,
]

# Tool name to handler mapping
HANDLERS = {
    "list_issues": handle_list_issues,
    "create_issue": handle_create_issue,
}


__all__ = [
    # Tool definitions
    "TOOLS",
    "LIST_ISSUES_TOOL",
    "CREATE_ISSUE_TOOL",
    # Handlers
    "HANDLERS",
    "handle_list_issues",
    "handle_create_issue",
]
