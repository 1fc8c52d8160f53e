"""Tests for the gitlab-mcp server."""

from unittest.mock import MagicMock, patch

import pytest
from mcp.types import CallToolRequest, CallToolRequestParams, ListToolsRequest

from gitlab_mcp import __version__
from gitlab_mcp.core.envelope import result_text
from gitlab_mcp.handlers import ALL_HANDLERS, ALL_TOOLS
from gitlab_mcp.server import create_server, dispatch, main

EXPECTED_REQUIRED = {
    "list_projects": [],
    "get_project": ["project_id"],
    "list_issues": ["project_id"],
    "create_issue": ["project_id", "title"],
    "list_merge_requests": ["project_id"],
    "create_merge_request": ["project_id", "source_branch", "target_branch", "title"],
    "get_file": ["project_id", "file_path"],
    "create_or_update_file": ["project_id", "file_path", "branch", "content", "commit_message"],
    "delete_file": ["project_id", "file_path", "branch", "commit_message"],
    "push_files": ["project_id", "branch", "commit_message", "files"],
    "create_branch": ["project_id", "branch", "ref"],
    "list_branches": ["project_id"],
}


class TestServerBasics:
    """Basic server tests."""

    def test_version(self):
        """Test version is defined."""
        assert __version__ == "1.0.0"

    def test_server_creation(self, service):
        """Test server can be created."""
        server = create_server(service)
        assert server.name == "gitlab-mcp"


class TestToolRegistry:
    """The catalog and the dispatch table describe the same twelve tools."""

    def test_tool_count(self):
        assert len(ALL_TOOLS) == 12

    def test_catalog_order_and_required_fields(self):
        assert [t.name for t in ALL_TOOLS] == list(EXPECTED_REQUIRED)
        for tool in ALL_TOOLS:
            assert tool.inputSchema.get("required", []) == EXPECTED_REQUIRED[tool.name]

    def test_handlers_match_tools(self):
        assert set(ALL_HANDLERS) == {t.name for t in ALL_TOOLS}


class TestDispatch:
    """Tests for the tool router."""

    @pytest.mark.asyncio
    async def test_unknown_tool(self, client, service):
        result = await dispatch("delete_project", {"project_id": "group/app"}, service)

        assert result.isError is True
        assert result_text(result) == "Unknown tool: delete_project"
        assert client.mock_calls == []

    @pytest.mark.asyncio
    async def test_none_arguments_are_empty(self, client, service):
        result = await dispatch("get_project", None, service)

        assert result_text(result) == "project_id is required"
        assert client.mock_calls == []

    @pytest.mark.asyncio
    async def test_routes_to_handler(self, client, service):
        client.projects.list.return_value = []

        result = await dispatch("list_projects", {}, service)

        assert result.isError is False
        assert result_text(result) == "[]"


class TestServerHandlers:
    """Requests go through the registered MCP request handlers."""

    @pytest.mark.asyncio
    async def test_list_tools(self, service):
        server = create_server(service)
        handler = server.request_handlers[ListToolsRequest]

        response = await handler(ListToolsRequest(method="tools/list"))

        assert [t.name for t in response.root.tools] == list(EXPECTED_REQUIRED)

    @pytest.mark.asyncio
    async def test_handler_failure_sets_is_error(self, client, service):
        server = create_server(service)
        handler = server.request_handlers[CallToolRequest]

        response = await handler(CallToolRequest(
            method="tools/call",
            params=CallToolRequestParams(name="get_project", arguments={}),
        ))

        assert response.root.isError is True
        assert response.root.content[0].text == "project_id is required"
        assert client.mock_calls == []

    @pytest.mark.asyncio
    async def test_success_returns_text(self, client, service):
        client.projects.list.return_value = []
        server = create_server(service)
        handler = server.request_handlers[CallToolRequest]

        response = await handler(CallToolRequest(
            method="tools/call",
            params=CallToolRequestParams(name="list_projects", arguments={}),
        ))

        assert response.root.isError is False
        assert response.root.content[0].text == "[]"


class TestMain:
    """Tests for the process entry point."""

    def test_missing_token_exits(self, monkeypatch):
        monkeypatch.delenv("GITLAB_TOKEN", raising=False)

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 1

    def test_runs_until_interrupted(self, monkeypatch):
        monkeypatch.setenv("GITLAB_TOKEN", "glpat-test")
        monkeypatch.setenv("GITLAB_URL", "https://gitlab.example.com/")

        with patch("gitlab_mcp.server.run_server", new=MagicMock()) as run_server, \
                patch("gitlab_mcp.server.asyncio.run", side_effect=KeyboardInterrupt):
            main()

        service = run_server.call_args.args[0]
        assert service._client.url == "https://gitlab.example.com"

    def test_server_error_exits(self, monkeypatch):
        monkeypatch.setenv("GITLAB_TOKEN", "glpat-test")

        with patch("gitlab_mcp.server.run_server", new=MagicMock()), \
                patch("gitlab_mcp.server.asyncio.run", side_effect=RuntimeError("boom")):
            with pytest.raises(SystemExit) as exc_info:
                main()

        assert exc_info.value.code == 1
