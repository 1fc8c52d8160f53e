"""GitLab service helpers.

Thin wrappers over a python-gitlab client: one method per remote operation,
each returning a ServiceResult that carries a compact payload model.
Authentication and the base URL are fixed when the client is built.
"""


from __future__ import annotations

import base64
import binascii
import logging
from typing import Any

import gitlab
from gitlab.exceptions import GitlabAuthenticationError, GitlabError
from requests.exceptions import RequestException

from ..config import GitLabConfig
from ..constants import ACTION_CREATE, ACTION_UPDATE
from ..core.models import (
    BranchSummary,
    CreatedBranch,
    CreatedIssue,
    CreatedMergeRequest,
    FileAction,
    FileChange,
    FileContent,
    IssueSummary,
    MergeRequestSummary,
    ProjectDetails,
    ProjectSummary,
    PushResult,
)
from .base import ErrorCode, ServiceResult

logger = logging.getLogger(__name__)

# Everything a remote call may raise that is reported to the caller
REMOTE_ERRORS = (GitlabError, RequestException)


def create_client(config: GitLabConfig) -> gitlab.Gitlab:
    """Build the process-wide python-gitlab client. Makes no request."""
    return gitlab.Gitlab(
        url=config.url,
        private_token=config.token,
        ssl_verify=config.ssl_verify,
    )


def decode_content(content: str, encoding: str | None) -> str:
    """
    Return file content as text, decoding base64 payloads.

    Raises:
        binascii.Error: If a base64 payload is malformed
    """
    if encoding != "base64":
        return content
    compact = content.replace("\n", "").replace("\r", "")
    raw = base64.b64decode(compact, validate=True)
    return raw.decode("utf-8", errors="replace")


def _attrs(obj: Any) -> dict[str, Any]:
    """Raw attribute dict of a python-gitlab object (some calls return plain dicts)."""
    if isinstance(obj, dict):
        return obj
    return obj.attributes


def _error_code(error: Exception) -> ErrorCode:
    if isinstance(error, GitlabAuthenticationError):
        return ErrorCode.GITLAB_AUTH_ERROR
    status = getattr(error, "response_code", None)
    if status in (401, 403):
        return ErrorCode.GITLAB_AUTH_ERROR
    if status == 404:
        return ErrorCode.GITLAB_NOT_FOUND
    return ErrorCode.GITLAB_API_ERROR


class GitLabService:
    """GitLab operations used by the tool handlers (projects, issues, MRs, files, branches)."""

    def __init__(self, client: gitlab.Gitlab):
        self._client = client

    @classmethod
    def from_config(cls, config: GitLabConfig) -> GitLabService:
        return cls(create_client(config))

    def _project(self, project_id: str):
        # lazy=True builds the handle locally; only the sub-resource call hits the API
        return self._client.projects.get(project_id, lazy=True)

    def _failure(self, action: str, error: Exception) -> ServiceResult:
        logger.warning(f"Failed to {action}: {error}")
        return ServiceResult.fail(_error_code(error), f"Failed to {action}: {error}")

    # =========================================================================
    # Projects
    # =========================================================================

    def list_projects(self, options: dict[str, Any]) -> ServiceResult[list[ProjectSummary]]:
        """List one page of projects."""
        try:
            projects = self._client.projects.list(get_all=False, **options)
        except REMOTE_ERRORS as e:
            return self._failure("list projects", e)

        return ServiceResult.ok([ProjectSummary.from_attributes(_attrs(p)) for p in projects])

    def get_project(self, project_id: str) -> ServiceResult[ProjectDetails]:
        """Get a single project by numeric ID or namespaced path."""
        try:
            project = self._client.projects.get(project_id)
        except REMOTE_ERRORS as e:
            return self._failure("get project", e)

        return ServiceResult.ok(ProjectDetails.from_attributes(_attrs(project)))

    # =========================================================================
    # Issues
    # =========================================================================

    def list_issues(
        self,
        project_id: str,
        options: dict[str, Any]
    ) -> ServiceResult[list[IssueSummary]]:
        try:
            issues = self._project(project_id).issues.list(get_all=False, **options)
        except REMOTE_ERRORS as e:
            return self._failure("list issues", e)

        return ServiceResult.ok([IssueSummary.from_attributes(_attrs(i)) for i in issues])

    def create_issue(self, project_id: str, options: dict[str, Any]) -> ServiceResult[CreatedIssue]:
        try:
            issue = self._project(project_id).issues.create(options)
        except REMOTE_ERRORS as e:
            return self._failure("create issue", e)

        return ServiceResult.ok(CreatedIssue.from_attributes(_attrs(issue)))

    # =========================================================================
    # Merge Requests
    # =========================================================================

    def list_merge_requests(
        self,
        project_id: str,
        options: dict[str, Any]
    ) -> ServiceResult[list[MergeRequestSummary]]:
        try:
            mrs = self._project(project_id).mergerequests.list(get_all=False, **options)
        except REMOTE_ERRORS as e:
            return self._failure("list merge requests", e)

        return ServiceResult.ok([MergeRequestSummary.from_attributes(_attrs(mr)) for mr in mrs])

    def create_merge_request(
        self,
        project_id: str,
        options: dict[str, Any]
    ) -> ServiceResult[CreatedMergeRequest]:
        try:
            mr = self._project(project_id).mergerequests.create(options)
        except REMOTE_ERRORS as e:
            return self._failure("create merge request", e)

        return ServiceResult.ok(CreatedMergeRequest.from_attributes(_attrs(mr)))

    # =========================================================================
    # Repository Files
    # =========================================================================

    def get_file(self, project_id: str, file_path: str, ref: str) -> ServiceResult[FileContent]:
        """Fetch a file and return its content as plain text."""
        try:
            f = self._project(project_id).files.get(file_path=file_path, ref=ref)
        except REMOTE_ERRORS as e:
            return self._failure("get file", e)

        attrs = _attrs(f)
        try:
            content = decode_content(attrs.get("content") or "", attrs.get("encoding"))
        except binascii.Error as e:
            logger.warning(f"Failed to decode file content of {file_path}: {e}")
            return ServiceResult.fail(
                ErrorCode.DECODE_ERROR,
                f"Failed to decode file content: {e}"
            )

        return ServiceResult.ok(FileContent(
            file_name=attrs.get("file_name"),
            file_path=attrs.get("file_path"),
            size=attrs.get("size"),
            ref=attrs.get("ref"),
            content=content,
        ))

    def file_exists(self, project_id: str, file_path: str, ref: str) -> bool:
        """
        Check whether a file exists at ref.

        Only a successful read counts; not-found and transient errors both
        report False. There is no lock between this check and a later write.
        """
        try:
            f = self._project(project_id).files.get(file_path=file_path, ref=ref)
        except REMOTE_ERRORS as e:
            logger.debug(f"Existence check for {file_path}@{ref}: {e}")
            return False
        return f is not None

    def create_or_update_file(
        self,
        project_id: str,
        file_path: str,
        options: dict[str, Any]
    ) -> ServiceResult[FileChange]:
        """
        Commit a single file, updating it when it already exists on the branch.

        options must hold branch, content and commit_message; author_email and
        author_name are passed through when set.
        """
        branch = options["branch"]
        files = self._project(project_id).files

        if self.file_exists(project_id, file_path, branch):
            try:
                response = files.update(file_path, dict(options))
            except REMOTE_ERRORS as e:
                return self._failure("update file", e)
            action = "updated"
        else:
            try:
                response = files.create({"file_path": file_path, **options})
            except REMOTE_ERRORS as e:
                return self._failure("create file", e)
            action = "created"

        attrs = _attrs(response) if response is not None else {}
        return ServiceResult.ok(FileChange(
            action=action,
            file_path=attrs.get("file_path", file_path),
            branch=attrs.get("branch", branch),
        ))

    def delete_file(
        self,
        project_id: str,
        file_path: str,
        options: dict[str, Any]
    ) -> ServiceResult[FileChange]:
        """Delete a file; options must hold branch and commit_message."""
        try:
            self._project(project_id).files.delete(file_path=file_path, **options)
        except REMOTE_ERRORS as e:
            return self._failure("delete file", e)

        return ServiceResult.ok(FileChange(
            action="deleted",
            file_path=file_path,
            branch=options["branch"],
        ))

    def push_files(
        self,
        project_id: str,
        files: list[tuple[str, str]],
        options: dict[str, Any]
    ) -> ServiceResult[PushResult]:
        """
        Commit several files at once.

        Each (path, content) pair becomes an update action if the file exists
        on the branch, otherwise a create action. All actions go out in one
        commit request.
        """
        branch = options["branch"]

        actions = []
        for path, content in files:
            action = ACTION_UPDATE if self.file_exists(project_id, path, branch) else ACTION_CREATE
            actions.append(FileAction(action=action, file_path=path, content=content))

        data = {**options, "actions": [a.to_dict() for a in actions]}
        try:
            commit = self._project(project_id).commits.create(data)
        except REMOTE_ERRORS as e:
            return self._failure("push files", e)

        return ServiceResult.ok(PushResult.from_commit(_attrs(commit), branch, actions))

    # =========================================================================
    # Branches
    # =========================================================================

    def create_branch(self, project_id: str, options: dict[str, Any]) -> ServiceResult[CreatedBranch]:
        try:
            branch = self._project(project_id).branches.create(options)
        except REMOTE_ERRORS as e:
            return self._failure("create branch", e)

        return ServiceResult.ok(CreatedBranch.from_attributes(_attrs(branch)))

    def list_branches(
        self,
        project_id: str,
        options: dict[str, Any]
    ) -> ServiceResult[list[BranchSummary]]:
        try:
            branches = self._project(project_id).branches.list(get_all=False, **options)
        except REMOTE_ERRORS as e:
            return self._failure("list branches", e)

        return ServiceResult.ok([BranchSummary.from_attributes(_attrs(b)) for b in branches])
