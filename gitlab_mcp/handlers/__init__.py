"""Tool registry: every MCP tool definition and its handler.

Handlers share one signature, ``async handle(arguments, service)``, and
always return a CallToolResult.
"""

from .branches import HANDLERS as BRANCH_HANDLERS
from .branches import TOOLS as BRANCH_TOOLS
from .files import HANDLERS as FILE_HANDLERS
from .files import TOOLS as FILE_TOOLS
from .issues import HANDLERS as ISSUE_HANDLERS
from .issues import TOOLS as ISSUE_TOOLS
from .merge_requests import HANDLERS as MERGE_REQUEST_HANDLERS
from .merge_requests import TOOLS as MERGE_REQUEST_TOOLS
from .projects import HANDLERS as PROJECT_HANDLERS
from .projects import TOOLS as PROJECT_TOOLS

# Combine all tools
ALL_TOOLS = [
    *PROJECT_TOOLS,
    *ISSUE_TOOLS,
    *MERGE_REQUEST_TOOLS,
    *FILE_TOOLS,
    *BRANCH_TOOLS,
]

# Combine all handlers
ALL_HANDLERS = {
    **PROJECT_HANDLERS,
    **ISSUE_HANDLERS,
    **MERGE_REQUEST_HANDLERS,
    **FILE_HANDLERS,
    **BRANCH_HANDLERS,
}


__all__ = [
    "ALL_TOOLS",
    "ALL_HANDLERS",
]
