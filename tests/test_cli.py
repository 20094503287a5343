"""Tests for the gl-share CLI and its lifecycle commands."""

import json
import logging

import pytest
import responses

from gl_share.cli import build_parser, main
from gl_share.operations import CreateOperation, ReadOperation, UpdateOperation

from conftest import make_args

# Constants (also defined in conftest.py for fixtures)
MOCK_GITLAB_URL = "https://gitlab.example.com"
MOCK_API_URL = f"{MOCK_GITLAB_URL}/api/v4"

BASE_ARGS = ["--gitlab-url", MOCK_GITLAB_URL, "--max-retries", "0"]


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger = logging.getLogger("gl-share")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)


@pytest.fixture
def token(monkeypatch):
    monkeypatch.setenv("GITLAB_TOKEN", "test-token")


class TestParser:
    """Tests for argument parsing."""

    def test_all_commands_registered(self):
        parser = build_parser()
        for argv in (
            ["create", "42", "7", "--access-level", "developer"],
            ["read", "42:7"],
            ["update", "42:7", "--access-level", "guest"],
            ["delete", "42:7"],
            ["import", "42:7"],
        ):
            assert parser.parse_args(argv).operation == argv[0]

    def test_group_id_must_be_numeric(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["create", "42", "devs", "--access-level", "developer"])


class TestMain:
    """End-to-end tests through main()."""

    def test_missing_token(self, monkeypatch, capsys):
        monkeypatch.delenv("GITLAB_TOKEN", raising=False)

        assert main(BASE_ARGS + ["read", "42:7"]) == 1
        assert "GITLAB_TOKEN" in capsys.readouterr().err

    @responses.activate
    def test_create_prints_state(self, token, capsys, sample_project):
        responses.add(responses.POST, f"{MOCK_API_URL}/projects/42/share", json={"id": 1}, status=201)
        responses.add(responses.GET, f"{MOCK_API_URL}/projects/42", json=sample_project)

        assert main(BASE_ARGS + ["create", "42", "7", "--access-level", "developer"]) == 0

        out = capsys.readouterr().out
        assert json.loads(out) == {"id": "42:7", "project_id": "42", "group_id": 7, "access_level": "developer"}

    @responses.activate
    def test_owner_rejected_without_request(self, token, capsys):
        assert main(BASE_ARGS + ["create", "42", "7", "--access-level", "owner"]) == 1
        assert len(responses.calls) == 0
        assert "owner" in capsys.readouterr().err

    @responses.activate
    def test_delete(self, token, capsys):
        responses.add(responses.DELETE, f"{MOCK_API_URL}/projects/42/share/7", status=204)

        assert main(BASE_ARGS + ["delete", "42:7"]) == 0
        assert capsys.readouterr().out == ""

    @responses.activate
    def test_api_error_exit_code(self, token):
        responses.add(responses.DELETE, f"{MOCK_API_URL}/projects/42/share/7", status=404)

        assert main(BASE_ARGS + ["delete", "42:7"]) == 1

    @responses.activate
    def test_json_mode_emits_action_result(self, token, capsys, sample_project):
        responses.add(responses.GET, f"{MOCK_API_URL}/projects/42", json=sample_project)

        assert main(BASE_ARGS + ["--json", "import", "42:3"]) == 0

        err_lines = [json.loads(line) for line in capsys.readouterr().err.splitlines() if line]
        assert {
            "resource_id": "42:3",
            "operation": "import",
            "action": "imported",
            "detail": "access_level=reporter",
        } in err_lines


class TestOperations:
    """Tests for operations driven directly with a resource."""

    @responses.activate
    def test_read_not_found(self, share_resource, sample_project):
        sample_project["shared_with_groups"] = []
        responses.add(responses.GET, f"{MOCK_API_URL}/projects/42", json=sample_project)

        op = ReadOperation(share_resource, make_args(resource_id="42:7"))
        result = op.run()

        assert result.action == "not_found"
        assert op.state() == {"id": "42:7"}

    @responses.activate
    def test_update_not_found_after_reshare(self, share_resource, sample_project):
        sample_project["shared_with_groups"] = []
        responses.add(responses.POST, f"{MOCK_API_URL}/projects/42/share", json={"id": 1}, status=201)
        responses.add(responses.GET, f"{MOCK_API_URL}/projects/42", json=sample_project)

        op = UpdateOperation(share_resource, make_args(resource_id="42:7", access_level="maintainer"))
        result = op.run()

        assert result.action == "not_found"
        assert len(responses.calls) == 2

    def test_update_malformed_id(self, share_resource):
        op = UpdateOperation(share_resource, make_args(resource_id="42", access_level="guest"))
        result = op.run()

        assert result.action == "error"
        assert op.state() == {}

    @responses.activate
    def test_create_records_result(self, share_resource, sample_project):
        responses.add(responses.POST, f"{MOCK_API_URL}/projects/42/share", json={"id": 1}, status=201)
        responses.add(responses.GET, f"{MOCK_API_URL}/projects/42", json=sample_project)

        op = CreateOperation(share_resource, make_args(project_id="42", group_id=7, access_level="developer"))
        result = op.run()

        assert result.action == "created"
        assert op.results == [result]
