"""Registry for project MCP tool definitions and handlers."""

from .get_project import (
    TOOL_DEFINITION as GET_PROJECT_TOOL,
    handle as handle_get_project,
)
from .list_projects import (
    TOOL_DEFINITION as LIST_PROJECTS_TOOL,
    handle as handle_list_projects,
)

# All project tool definitions
TOOLS = [
    LIST_PROJECTS_TOOL,
    GET_PROJECT_TOOL,
]

# Tool name to handler mapping
HANDLERS = {
    "list_projects": handle_list_projects,
    "get_project": handle_get_project,
}


__all__ = [
    # Tool definitions
    "TOOLS",
    "LIST_PROJECTS_TOOL",
    "GET_PROJECT_TOOL",
    # Handlers
    "HANDLERS",
    "handle_list_projects",
    "handle_get_project",
]
