"""GitLab MCP Server - GitLab projects, issues, merge requests, files and branches as MCP tools."""

__version__ = "1.0.0"
