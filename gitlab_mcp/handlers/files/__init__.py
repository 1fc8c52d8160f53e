"""Registry for repository file MCP tool definitions and handlers."""

from .create_or_update_file import (
    TOOL_DEFINITION as CREATE_OR_UPDATE_FILE_TOOL,
    handle as handle_create_or_update_file,
)
from .delete_file import (
    TOOL_DEFINITION as DELETE_FILE_TOOL,
    handle as handle_delete_file,
)
from .get_file import (
    TOOL_DEFINITION as GET_FILE_TOOL,
    handle as handle_get_file,
)
from .push_files import (
    TOOL_DEFINITION as PUSH_FILES_TOOL,
    handle as handle_push_files,
)

# All file tool definitions
TOOLS = [
    GET_FILE_TOOL,
    CREATE_OR_UPDATE_FILE_TOOL,
    DELETE_FILE_TOOL,
    PUSH_FILES_TOOL,
]

# Tool name to handler mapping
HANDLERS = {
    "get_file": handle_get_file,
    "create_or_update_file": handle_create_or_update_file,
    "delete_file": handle_delete_file,
    "push_files": handle_push_files,
}


__all__ = [
    # Tool definitions
    "TOOLS",
    "GET_FILE_TOOL",
    "CREATE_OR_UPDATE_FILE_TOOL",
    "DELETE_FILE_TOOL",
    "PUSH_FILES_TOOL",
    # Handlers
    "HANDLERS",
    "handle_get_file",
    "handle_create_or_update_file",
    "handle_delete_file",
    "handle_push_files",
]
