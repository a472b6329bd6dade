"""Tests for the journal command-line client.

HTTP calls are patched; no server is started.
"""

from unittest.mock import patch

import httpx
import pytest
from click.testing import CliRunner

from app import cli

HEALTH = httpx.Response(200, text="Pib Journal backend")


@pytest.fixture
def runner():
    return CliRunner()


@pytest.mark.fast
class TestLogin:
    def test_prints_token(self, runner):
        with patch("app.cli.httpx.post", return_value=httpx.Response(200, json={"token": "tok-123"})) as post:
            result = runner.invoke(cli.main, ["login", "--username", "admin", "--password", "pw"])

        assert result.exit_code == 0
        assert result.output.strip() == "tok-123"
        assert post.call_args.args[0] == f"{cli.API_BASE}/api/login"
        assert post.call_args.kwargs["json"] == {"username": "admin", "password": "pw"}

    def test_bad_credentials_exit_1(self, runner):
        with patch("app.cli.httpx.post", return_value=httpx.Response(401, text="Invalid credentials")):
            result = runner.invoke(cli.main, ["login", "--username", "admin", "--password", "no"])

        assert result.exit_code == 1
        assert "Invalid credentials" in result.output


@pytest.mark.fast
class TestList:
    def test_renders_entries(self, runner):
        entries = [
            {"id": "1", "title": "Day 1", "date": "2026-02-09T08:30:00Z", "file": "a"},
            {"id": "2", "title": "Day 2", "date": "2026-02-10T08:30:00Z", "file": "b"},
        ]
        with patch("app.cli.httpx.get", side_effect=[HEALTH, httpx.Response(200, json=entries)]):
            result = runner.invoke(cli.main, ["list"])

        assert result.exit_code == 0
        assert "Day 1" in result.output
        assert "Day 2" in result.output

    def test_empty_journal(self, runner):
        with patch("app.cli.httpx.get", side_effect=[HEALTH, httpx.Response(200, json=[])]):
            result = runner.invoke(cli.main, ["list"])

        assert result.exit_code == 0
        assert "No entries yet" in result.output

    def test_server_down(self, runner):
        with patch("app.cli.httpx.get", side_effect=httpx.ConnectError("refused")):
            result = runner.invoke(cli.main, ["list"])

        assert result.exit_code == 1
        assert "Could not connect" in result.output


@pytest.mark.fast
class TestWrite:
    def test_posts_entry_with_token(self, runner):
        created = httpx.Response(201, json={"ok": True, "id": "abc-123"})
        with patch("app.cli.httpx.get", return_value=HEALTH), \
                patch("app.cli.httpx.post", return_value=created) as post:
            result = runner.invoke(
                cli.main,
                ["write", "Day 1", "Went well"],
                env={"JOURNAL_TOKEN": "tok-123"},
            )

        assert result.exit_code == 0
        assert "abc-123" in result.output
        assert post.call_args.kwargs["json"] == {"title": "Day 1", "body": "Went well"}
        assert post.call_args.kwargs["headers"] == {"Authorization": "Bearer tok-123"}

    def test_requires_token(self, runner):
        result = runner.invoke(cli.main, ["write", "Day 1", "Went well"], env={"JOURNAL_TOKEN": None})
        assert result.exit_code == 2

    def test_rejected_token_exit_1(self, runner):
        with patch("app.cli.httpx.get", return_value=HEALTH), \
                patch("app.cli.httpx.post", return_value=httpx.Response(401, text="Invalid token")):
            result = runner.invoke(cli.main, ["write", "Day 1", "Went well", "--token", "bad"])

        assert result.exit_code == 1
        assert "Invalid token" in result.output
