"""
Tests for the result envelope builder and payload models.
"""

import json

from gitlab_mcp.core.envelope import (
    error_result,
    from_service_result,
    render,
    result_text,
    success_result,
)
from gitlab_mcp.core.models import (
    BranchSummary,
    FileAction,
    IssueSummary,
    ProjectDetails,
    PushResult,
)
from gitlab_mcp.services.base import ErrorCode, ServiceResult


class TestEnvelope:
    """Tests for success/error envelopes."""

    def test_success_is_indented_json(self):
        result = success_result({"iid": 1, "title": "Bug"})

        assert result.isError is False
        assert result_text(result) == '{\n  "iid": 1,\n  "title": "Bug"\n}'

    def test_success_list_of_dataclasses(self):
        payload = [
            BranchSummary(name="main", commit="abc", protected=True, default=True, web_url=None),
        ]
        data = json.loads(result_text(success_result(payload)))

        assert data == [{
            "name": "main",
            "commit": "abc",
            "protected": True,
            "default": True,
            "web_url": None,
        }]

    def test_error_carries_message(self):
        result = error_result("project_id is required")

        assert result.isError is True
        assert result_text(result) == "project_id is required"

    def test_unserializable_payload(self):
        result = success_result({"value": object()})

        assert result.isError is True
        assert result_text(result).startswith("Failed to marshal result:")

    def test_non_ascii_kept(self):
        assert "日本語" in render({"title": "日本語"})

    def test_from_failed_service_result(self):
        result = from_service_result(
            ServiceResult.fail(ErrorCode.GITLAB_NOT_FOUND, "Failed to get project: 404: Not Found")
        )

        assert result.isError is True
        assert result_text(result) == "Failed to get project: 404: Not Found"

    def test_from_successful_service_result(self):
        result = from_service_result(ServiceResult.ok([]))

        assert result.isError is False
        assert result_text(result) == "[]"


class TestPayloadModels:
    """Tests for the minimized payload models."""

    def test_project_details_drops_extra_fields(self):
        details = ProjectDetails.from_attributes({
            "id": 7,
            "name": "app",
            "path_with_namespace": "group/app",
            "description": None,
            "web_url": "https://gitlab.example.com/group/app",
            "default_branch": "main",
            "visibility": "private",
            "created_at": "2024-01-01T00:00:00Z",
            "last_activity_at": "2024-02-01T00:00:00Z",
            "star_count": 3,
            "forks_count": 1,
            "ssh_url_to_repo": "git@gitlab.example.com:group/app.git",
        })
        data = details.to_dict()

        assert "ssh_url_to_repo" not in data
        assert data["open_issues_count"] is None
        assert list(data)[:3] == ["id", "name", "path_with_namespace"]

    def test_issue_author_is_username(self):
        issue = IssueSummary.from_attributes({
            "iid": 4,
            "title": "Crash",
            "state": "opened",
            "author": {"id": 1, "username": "ada", "name": "Ada"},
            "labels": ["bug"],
            "created_at": "2024-01-01T00:00:00Z",
            "web_url": "https://gitlab.example.com/group/app/-/issues/4",
        })

        assert issue.author == "ada"
        assert issue.labels == ["bug"]

    def test_push_result_counts_files(self):
        actions = [
            FileAction(action="update", file_path="a.txt", content="x"),
            FileAction(action="create", file_path="b.txt", content="y"),
        ]
        result = PushResult.from_commit(
            {"id": "abc123", "short_id": "abc", "message": "sync", "web_url": None},
            "main",
            actions,
        )

        assert result.files_pushed == ["a.txt", "b.txt"]
        assert result.files_count == 2
        assert result.commit_sha == "abc"
