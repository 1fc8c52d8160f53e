"""Payload models returned by the GitLab tools.

Each model keeps a fixed subset of the fields GitLab returns so tool output
stays compact. Models are built from the raw attribute dict of a
python-gitlab object (or the dict an API call returns) and serialized in
field order.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


def _username(user: Any) -> str | None:
    if isinstance(user, dict):
        return user.get("username")
    return None


def _commit_id(commit: Any) -> str | None:
    if isinstance(commit, dict):
        return commit.get("id")
    return None


class _Payload:
    """Mixin for dataclass payloads."""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


# =============================================================================
# Projects
# =============================================================================

@dataclass(frozen=True)
class ProjectSummary(_Payload):
    """One row of list_projects."""
    id: int
    name: str
    path_with_namespace: str
    description: str | None
    web_url: str
    default_branch: str | None

    @classmethod
    def from_attributes(cls, attrs: dict[str, Any]) -> ProjectSummary:
        return cls(
            id=attrs.get("id"),
            name=attrs.get("name"),
            path_with_namespace=attrs.get("path_with_namespace"),
            description=attrs.get("description"),
            web_url=attrs.get("web_url"),
            default_branch=attrs.get("default_branch"),
        )


@dataclass(frozen=True)
class ProjectDetails(_Payload):
    """Result of get_project."""
    id: int
    name: str
    path_with_namespace: str
    description: str | None
    web_url: str
    default_branch: str | None
    visibility: str | None
    created_at: str | None
    last_activity_at: str | None
    open_issues_count: int | None
    star_count: int | None
    forks_count: int | None

    @classmethod
    def from_attributes(cls, attrs: dict[str, Any]) -> ProjectDetails:
        return cls(
            id=attrs.get("id"),
            name=attrs.get("name"),
            path_with_namespace=attrs.get("path_with_namespace"),
            description=attrs.get("description"),
            web_url=attrs.get("web_url"),
            default_branch=attrs.get("default_branch"),
            visibility=attrs.get("visibility"),
            created_at=attrs.get("created_at"),
            last_activity_at=attrs.get("last_activity_at"),
            # Absent when the issues feature is disabled
            open_issues_count=attrs.get("open_issues_count"),
            star_count=attrs.get("star_count"),
            forks_count=attrs.get("forks_count"),
        )


# =============================================================================
# Issues
# =============================================================================

@dataclass(frozen=True)
class IssueSummary(_Payload):
    """One row of list_issues."""
    iid: int
    title: str
    state: str
    author: str | None
    labels: list[str]
    created_at: str | None
    web_url: str

    @classmethod
    def from_attributes(cls, attrs: dict[str, Any]) -> IssueSummary:
        return cls(
            iid=attrs.get("iid"),
            title=attrs.get("title"),
            state=attrs.get("state"),
            author=_username(attrs.get("author")),
            labels=list(attrs.get("labels") or []),
            created_at=attrs.get("created_at"),
            web_url=attrs.get("web_url"),
        )


@dataclass(frozen=True)
class CreatedIssue(_Payload):
    """Result of create_issue."""
    iid: int
    title: str
    web_url: str

    @classmethod
    def from_attributes(cls, attrs: dict[str, Any]) -> CreatedIssue:
        return cls(
            iid=attrs.get("iid"),
            title=attrs.get("title"),
            web_url=attrs.get("web_url"),
        )


# =============================================================================
# Merge Requests
# =============================================================================

@dataclass(frozen=True)
class MergeRequestSummary(_Payload):
    """One row of list_merge_requests."""
    iid: int
    title: str
    state: str
    author: str | None
    source_branch: str
    target_branch: str
    created_at: str | None
    web_url: str

    @classmethod
    def from_attributes(cls, attrs: dict[str, Any]) -> MergeRequestSummary:
        return cls(
            iid=attrs.get("iid"),
            title=attrs.get("title"),
            state=attrs.get("state"),
            author=_username(attrs.get("author")),
            source_branch=attrs.get("source_branch"),
            target_branch=attrs.get("target_branch"),
            created_at=attrs.get("created_at"),
            web_url=attrs.get("web_url"),
        )


@dataclass(frozen=True)
class CreatedMergeRequest(_Payload):
    """Result of create_merge_request."""
    iid: int
    title: str
    state: str
    source_branch: str
    target_branch: str
    web_url: str

    @classmethod
    def from_attributes(cls, attrs: dict[str, Any]) -> CreatedMergeRequest:
        return cls(
            iid=attrs.get("iid"),
            title=attrs.get("title"),
            state=attrs.get("state"),
            source_branch=attrs.get("source_branch"),
            target_branch=attrs.get("target_branch"),
            web_url=attrs.get("web_url"),
        )


# =============================================================================
# Repository Files
# =============================================================================

@dataclass(frozen=True)
class FileContent(_Payload):
    """Result of get_file (content already decoded to text)."""
    file_name: str
    file_path: str
    size: int
    ref: str
    content: str


@dataclass(frozen=True)
class FileChange(_Payload):
    """Result of create_or_update_file and delete_file."""
    action: str
    file_path: str
    branch: str


@dataclass(frozen=True)
class FileAction(_Payload):
    """One entry of the actions list sent to the commits API."""
    action: str
    file_path: str
    content: str


@dataclass(frozen=True)
class PushResult(_Payload):
    """Result of push_files."""
    commit_id: str
    commit_sha: str
    message: str
    branch: str
    files_pushed: list[str]
    files_count: int
    web_url: str | None

    @classmethod
    def from_commit(
        cls,
        attrs: dict[str, Any],
        branch: str,
        actions: list[FileAction],
    ) -> PushResult:
        paths = [a.file_path for a in actions]
        return cls(
            commit_id=attrs.get("id"),
            commit_sha=attrs.get("short_id"),
            message=attrs.get("message"),
            branch=branch,
            files_pushed=paths,
            files_count=len(paths),
            web_url=attrs.get("web_url"),
        )


# =============================================================================
# Branches
# =============================================================================

@dataclass(frozen=True)
class CreatedBranch(_Payload):
    """Result of create_branch."""
    name: str
    commit: str | None
    protected: bool
    web_url: str | None

    @classmethod
    def from_attributes(cls, attrs: dict[str, Any]) -> CreatedBranch:
        return cls(
            name=attrs.get("name"),
            commit=_commit_id(attrs.get("commit")),
            protected=attrs.get("protected"),
            web_url=attrs.get("web_url"),
        )


@dataclass(frozen=True)
class BranchSummary(_Payload):
    """One row of list_branches."""
    name: str
    commit: str | None
    protected: bool
    default: bool
    web_url: str | None

    @classmethod
    def from_attributes(cls, attrs: dict[str, Any]) -> BranchSummary:
        return cls(
            name=attrs.get("name"),
            commit=_commit_id(attrs.get("commit")),
            protected=attrs.get("protected"),
            default=attrs.get("default"),
            web_url=attrs.get("web_url"),
        )
