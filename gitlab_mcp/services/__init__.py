"""Services package.

Exposes the GitLab service and the shared result types used by handlers.
"""


# Base utilities
from .base import (
    ErrorCode,
    ServiceError,
    ServiceResult,
)

# GitLab
from .gitlab import GitLabService, create_client, decode_content

__all__ = [
    # Base
    "ServiceResult",
    "ServiceError",
    "ErrorCode",
    # GitLab
    "GitLabService",
    "create_client",
    "decode_content",
]


# =============================================================================
# Convenience factory functions
# =============================================================================

def create_gitlab_service(config) -> GitLabService:
    """Factory for GitLabService from a GitLabConfig."""

    return GitLabService.from_config(config)
