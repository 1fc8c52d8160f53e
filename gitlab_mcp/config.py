"""
Server configuration loaded from the environment.

Environment variables:
    GITLAB_TOKEN: Personal, project or group access token with 'api' scope (required)
    GITLAB_URL: GitLab instance URL (default: https://gitlab.com)
    GITLAB_VERIFY_SSL: Verify SSL certificates (default: true)
    GITLAB_MCP_LOG_LEVEL: Logging level name (default: INFO)
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from .constants import API_PATH_SUFFIX, DEFAULT_GITLAB_URL, FALSE_VALUES, LOG_LEVELS


class ConfigError(ValueError):
    """Raised when the environment does not describe a usable configuration."""


@dataclass(frozen=True)
class GitLabConfig:
    """
    Immutable connection settings shared by every tool call.

    Attributes:
        token: Access token sent as PRIVATE-TOKEN
        url: Instance base URL without the /api/v4 suffix
        ssl_verify: Whether TLS certificates are verified
        log_level: Logging level name for the server process
    """
    token: str = field(repr=False)
    url: str = DEFAULT_GITLAB_URL
    ssl_verify: bool = True
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> GitLabConfig:
        """
        Build the configuration from environment variables.

        Raises:
            ConfigError: If GITLAB_TOKEN is missing or a value is invalid
        """
        env = os.environ if environ is None else environ

        token = env.get("GITLAB_TOKEN", "").strip()
        if not token:
            raise ConfigError("GITLAB_TOKEN environment variable is required")

        url = normalize_url(env.get("GITLAB_URL", "") or DEFAULT_GITLAB_URL)
        if not url.startswith(("http://", "https://")):
            raise ConfigError(f"Invalid GITLAB_URL: {url}. Must start with http:// or https://")

        ssl_verify = env.get("GITLAB_VERIFY_SSL", "true").strip().lower() not in FALSE_VALUES
        log_level = env.get("GITLAB_MCP_LOG_LEVEL", "INFO").strip().upper() or "INFO"
        if log_level not in LOG_LEVELS:
            raise ConfigError(f"Invalid GITLAB_MCP_LOG_LEVEL: {log_level}")

        return cls(token=token, url=url, ssl_verify=ssl_verify, log_level=log_level)


def normalize_url(url: str) -> str:
    """Strip whitespace, trailing slashes and an /api/v4 suffix (the client adds it)."""
    url = url.strip().rstrip("/")
    if url.endswith(API_PATH_SUFFIX):
        url = url[: -len(API_PATH_SUFFIX)].rstrip("/")
    return url
