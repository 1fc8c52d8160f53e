"""
Service Layer Base - result types returned by GitLabService.

This module provides:
- ServiceResult: A generic result wrapper (success/failure)
- ServiceError: The failure message and its classification
- ErrorCode: How a remote failure was classified

Services never raise for remote failures; they return a failed
ServiceResult that handlers turn into an error envelope.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

# Generic type for result data
T = TypeVar("T")


class ErrorCode(str, Enum):
    """Classification of a failed GitLab operation."""
    # Content handling
    DECODE_ERROR = "decode_error"

    # GitLab operations
    GITLAB_AUTH_ERROR = "gitlab_auth_error"
    GITLAB_NOT_FOUND = "gitlab_not_found"
    GITLAB_API_ERROR = "gitlab_api_error"


@dataclass(frozen=True)
class ServiceError:
    """
    Structured error information.

    Attributes:
        code: Classification of the failure
        message: "Failed to <verb> <noun>: <cause>", returned verbatim to the caller
    """
    code: ErrorCode
    message: str


@dataclass(frozen=True)
class ServiceResult(Generic[T]):
    """
    Generic result wrapper for service operations.

    Either success with data, or failure with error. Never both.

    Usage:
        result = service.get_project("group/app")
        if result.success:
            process(result.data)
        else:
            handle_error(result.error)
    """
    success: bool
    data: T | None = None
    error: ServiceError | None = None

    @classmethod
    def ok(cls, data: T) -> ServiceResult[T]:
        """Create a successful result."""
        return cls(success=True, data=data, error=None)

    @classmethod
    def fail(cls, code: ErrorCode, message: str) -> ServiceResult[T]:
        """Create a failed result."""
        return cls(
            success=False,
            data=None,
            error=ServiceError(code=code, message=message)
        )
