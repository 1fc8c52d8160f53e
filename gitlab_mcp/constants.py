"""
Shared constants used across the project.
"""

from typing import Final

SERVER_NAME: Final[str] = "gitlab-mcp"

# GitLab connection
DEFAULT_GITLAB_URL: Final[str] = "https://gitlab.com"
API_PATH_SUFFIX: Final[str] = "/api/v4"

# Listing defaults
DEFAULT_PER_PAGE: Final[int] = 20
DEFAULT_PAGE: Final[int] = 1
DEFAULT_STATE: Final[str] = "opened"

# Ref used when get_file is called without one (resolves to the default branch)
DEFAULT_FILE_REF: Final[str] = "HEAD"

# Commit action names understood by the commits API
ACTION_CREATE: Final[str] = "create"
ACTION_UPDATE: Final[str] = "update"

# Values of GITLAB_VERIFY_SSL that disable certificate checks
FALSE_VALUES: Final[frozenset[str]] = frozenset({"false", "0", "no", "off"})

LOG_LEVELS: Final[frozenset[str]] = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})
