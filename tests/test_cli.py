"""Client CLI tests, with HTTP requests served in-process by the API app."""

import httpx
import pytest
from fastapi.testclient import TestClient
from typer.testing import CliRunner

from app.client import cli
from app.main import app as api_app
from tests.helpers import write_files

runner = CliRunner()


@pytest.fixture(autouse=True)
def in_process_server(store_root, monkeypatch, tmp_path):
    monkeypatch.setattr(cli, "get_client", lambda server: TestClient(api_app))
    monkeypatch.chdir(tmp_path)


class TestFileCommands:
    def test_add(self, store_root, tmp_path):
        (tmp_path / "notes.txt").write_text("hello there")
        result = runner.invoke(cli.app, ["add", "notes.txt"])
        assert result.exit_code == 0
        assert "File 'notes.txt' added successfully" in result.output
        assert (store_root / "notes.txt").read_text() == "hello there"

    def test_add_missing_local_file_continues(self, store_root, tmp_path):
        (tmp_path / "real.txt").write_text("x")
        result = runner.invoke(cli.app, ["add", "missing.txt", "real.txt"])
        assert result.exit_code == 1
        assert "File 'missing.txt' not found" in result.output
        assert "File 'real.txt' added successfully" in result.output
        assert (store_root / "real.txt").exists()

    def test_add_existing_reports_conflict(self, store_root, tmp_path):
        write_files(store_root, {"notes.txt": "server copy"})
        (tmp_path / "notes.txt").write_text("local copy")
        result = runner.invoke(cli.app, ["add", "notes.txt"])
        assert result.exit_code == 1
        assert "409" in result.output

    def test_ls(self, store_root):
        write_files(store_root, {"a.txt": "x", "b.txt": "y"})
        result = runner.invoke(cli.app, ["ls"])
        assert result.exit_code == 0
        assert result.output.split() == ["a.txt", "b.txt"]

    def test_rm(self, store_root):
        write_files(store_root, {"a.txt": "x"})
        result = runner.invoke(cli.app, ["rm", "a.txt"])
        assert result.exit_code == 0
        assert "removed successfully" in result.output
        assert not (store_root / "a.txt").exists()

    def test_rm_missing(self):
        result = runner.invoke(cli.app, ["rm", "a.txt"])
        assert result.exit_code == 1
        assert "404" in result.output

    def test_update(self, store_root, tmp_path):
        write_files(store_root, {"notes.txt": "old"})
        (tmp_path / "notes.txt").write_text("new")
        result = runner.invoke(cli.app, ["update", "notes.txt"])
        assert result.exit_code == 0
        assert (store_root / "notes.txt").read_text() == "new"

    def test_update_missing_local_file(self):
        result = runner.invoke(cli.app, ["update", "missing.txt"])
        assert result.exit_code == 1
        assert "not found" in result.output


class TestAnalyticsCommands:
    def test_wc(self, store_root):
        write_files(store_root, {"a.txt": "x y", "b.txt": "y z"})
        result = runner.invoke(cli.app, ["wc"])
        assert result.exit_code == 0
        assert "Total number of words: 4" in result.output

    def test_freq_words_defaults_to_ascending(self, store_root):
        write_files(store_root, {"a.txt": "a b a c b a"})
        result = runner.invoke(cli.app, ["freq-words"])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["1\tc", "2\tb", "3\ta"]

    def test_freq_words_limit_and_order(self, store_root):
        write_files(store_root, {"a.txt": "a b a c b a"})
        result = runner.invoke(cli.app, ["freq-words", "-n", "2", "--order", "dsc"])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["3\ta", "2\tb"]


def test_connection_error_exits_nonzero(monkeypatch):
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    monkeypatch.setattr(
        cli, "get_client", lambda server: httpx.Client(base_url=server, transport=httpx.MockTransport(refuse))
    )
    result = runner.invoke(cli.app, ["wc"])
    assert result.exit_code == 1
    assert "Error trying to get word count" in result.output


def test_add_keeps_going_after_connection_error(monkeypatch, tmp_path):
    attempted = []

    def refuse(request):
        attempted.append(request.url.path)
        raise httpx.ConnectError("connection refused", request=request)

    monkeypatch.setattr(
        cli, "get_client", lambda server: httpx.Client(base_url=server, transport=httpx.MockTransport(refuse))
    )
    (tmp_path / "one.txt").write_text("a")
    (tmp_path / "two.txt").write_text("b")
    result = runner.invoke(cli.app, ["add", "one.txt", "two.txt"])
    assert result.exit_code == 1
    assert attempted == ["/add/one.txt", "/add/two.txt"]
    assert "Error sending file 'two.txt' to server" in result.output
