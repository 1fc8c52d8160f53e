"""Shared fixtures: a call-recording python-gitlab stub and the service around it."""

from unittest.mock import MagicMock

import pytest

from gitlab_mcp.services import GitLabService


class FakeRESTObject:
    """Stands in for a python-gitlab RESTObject (only .attributes is used)."""

    def __init__(self, **attributes):
        self.attributes = attributes


@pytest.fixture
def client():
    """MagicMock gitlab.Gitlab; every remote call is recorded in mock_calls."""
    return MagicMock(name="gitlab_client")


@pytest.fixture
def project(client):
    """Project handle returned by client.projects.get(..., lazy=True)."""
    project = MagicMock(name="project")
    client.projects.get.return_value = project
    return project


@pytest.fixture
def service(client):
    return GitLabService(client)
