"""Shared test fixtures for gl-share tests."""

import argparse
import sys
from pathlib import Path
from typing import Any

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from gl_share.client import GitLabClient
from gl_share.resource import ProjectShareGroupResource

# Constants for use in tests - pytest makes conftest.py fixtures available,
# but these constants need to be imported directly from tests
MOCK_GITLAB_URL = "https://gitlab.example.com"
MOCK_API_URL = f"{MOCK_GITLAB_URL}/api/v4"


@pytest.fixture
def mock_client():
    """GitLabClient pointing at mock server, without retries."""
    return GitLabClient(MOCK_GITLAB_URL, "test-token", max_retries=0)


@pytest.fixture
def share_resource(mock_client):
    """Project group share resource backed by the mock client."""
    return ProjectShareGroupResource(mock_client)


@pytest.fixture
def sample_project() -> dict[str, Any]:
    """Sample project API response, shared with two groups."""
    return {
        "id": 42,
        "name": "my-project",
        "path_with_namespace": "myorg/my-project",
        "web_url": f"{MOCK_GITLAB_URL}/myorg/my-project",
        "shared_with_groups": [
            {"group_id": 3, "group_name": "qa", "group_full_path": "myorg/qa", "group_access_level": 20},
            {"group_id": 7, "group_name": "devs", "group_full_path": "myorg/devs", "group_access_level": 30},
        ],
    }


def make_args(**kwargs) -> argparse.Namespace:
    """Helper to create argparse.Namespace with default values."""
    defaults = {
        "json_output": False,
        "verbose": False,
        "gitlab_url": None,
        "max_retries": 0,
    }
    defaults.update(kwargs)
    return argparse.Namespace(**defaults)
