"""Integration tests for server/launch.py"""

import json
import socket
from types import SimpleNamespace

import pytest

from docview.config import Settings
from docview.server import launch
from docview.server.launch import AccessLog, port_available, reclaim_port, serve, viewer_url


@pytest.fixture(name="busy_port")
def busy_port_fixture():
    """A localhost port held open by a listening socket for the test's duration."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        s.listen(1)
        yield s.getsockname()[1]


def _entries(path):
    return [json.loads(line) for line in path.read_text().splitlines()]


def test_access_log_records_open_and_reject(tmp_path):
    log_path = tmp_path / "logs" / "access.jsonl"
    log = AccessLog(log_path)
    log.opened(tmp_path / "a.md", ".md")
    log.rejected(tmp_path / "b.exe", ".exe", "unsupported")

    opened, rejected = _entries(log_path)
    assert opened["action"] == "OPEN"
    assert opened["ext"] == ".md"
    assert rejected["action"] == "REJECT"
    assert rejected["reason"] == "unsupported"
    assert "ts" in rejected


def test_access_log_write_failure_is_not_fatal(tmp_path):
    """An unwritable log location only produces a warning."""
    blocker = tmp_path / "file"
    blocker.write_text("x")
    AccessLog(blocker / "access.jsonl").opened(tmp_path / "a.md", ".md")


def test_port_available_detects_listener(busy_port):
    assert not port_available("127.0.0.1", busy_port)


def test_serve_refuses_busy_port(busy_port):
    settings = Settings(port=busy_port, open_browser=False, reclaim_port=False)
    with pytest.raises(RuntimeError, match="already in use"):
        serve(settings)


def test_reclaim_port_with_no_listener(monkeypatch):
    monkeypatch.setattr(launch.psutil, "net_connections", lambda kind: [])
    assert reclaim_port(1) is False


def test_serve_reports_unreclaimable_port(busy_port, monkeypatch):
    monkeypatch.setattr(launch, "reclaim_port", lambda port: False)
    settings = Settings(port=busy_port, open_browser=False, reclaim_port=True)
    with pytest.raises(RuntimeError, match="free it manually"):
        serve(settings)


def test_viewer_url(tmp_path):
    settings = Settings(port=4000)
    assert viewer_url(settings) == "http://localhost:4000/"
    target = tmp_path / "my notes.md"
    assert viewer_url(settings, target) == (
        "http://localhost:4000/?file=" + target.resolve().as_posix().replace(" ", "%20")
    )


def test_open_browser_opens_url_after_delay(monkeypatch):
    opened = []
    monkeypatch.setattr(launch.webbrowser, "open", opened.append)
    timer = launch.open_browser("http://localhost:4000/", delay=0)
    timer.join(timeout=5)
    assert opened == ["http://localhost:4000/"]


def test_serve_rechecks_port_after_reclaim(busy_port, monkeypatch):
    """A port still held after reclaiming fails with a clear error instead of reaching the server."""
    monkeypatch.setattr(launch, "reclaim_port", lambda port: True)
    monkeypatch.setattr(launch.time, "sleep", lambda seconds: None)
    settings = Settings(port=busy_port, open_browser=False, reclaim_port=True)
    with pytest.raises(RuntimeError, match="still in use"):
        serve(settings)


class _VanishingProcess:
    """Stands in for a listener that exits between terminate() and kill()."""

    def __init__(self, pid):
        self.pid = pid

    def name(self):
        return "ghost"

    def terminate(self):
        pass

    def kill(self):
        raise launch.psutil.NoSuchProcess(self.pid)


def test_reclaim_port_tolerates_process_exit_before_kill(monkeypatch):
    conn = SimpleNamespace(pid=424242, laddr=SimpleNamespace(port=5), status=launch.psutil.CONN_LISTEN)
    monkeypatch.setattr(launch.psutil, "net_connections", lambda kind: [conn])
    monkeypatch.setattr(launch.psutil, "Process", _VanishingProcess)
    monkeypatch.setattr(launch.psutil, "wait_procs", lambda procs, timeout: ([], procs))
    assert reclaim_port(5) is True
