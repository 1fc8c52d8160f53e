"""Allow ``python -m gitlab_mcp``."""

from .server import main

main()
