"""Server startup: port conflicts, browser auto-open, and the access log"""

import json
import logging
import os
import socket
import threading
import time
import webbrowser
from datetime import datetime, timezone
from pathlib import Path
from urllib.parse import quote

import psutil

from docview.config import Settings
from docview.server.app import create_app


logger = logging.getLogger(__name__)


class AccessLog:
    """Append-only JSON-lines record of files opened (or refused) through the launcher."""

    def __init__(self, path: str | Path):
        self.path = Path(path).expanduser()

    def _append(self, entry: dict) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("a", encoding="utf-8") as f:
                f.write(json.dumps(entry) + "\n")
        except OSError as e:
            logger.warning("Could not write access log %s: %s", self.path, e)

    def opened(self, path: str | Path, ext: str) -> None:
        self._append({"ts": datetime.now(timezone.utc).isoformat(), "action": "OPEN", "ext": ext, "path": str(path)})

    def rejected(self, path: str | Path, ext: str, reason: str) -> None:
        self._append({
            "ts": datetime.now(timezone.utc).isoformat(), "action": "REJECT",
            "ext": ext, "path": str(path), "reason": reason,
        })


def port_available(host: str, port: int) -> bool:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        try:
            s.bind((host, port))
        except OSError:
            return False
    return True


def reclaim_port(port: int, timeout: float = 3.0) -> bool:
    """Stop processes listening on port. Returns True if at least one was stopped."""
    try:
        conns = psutil.net_connections(kind="inet")
    except psutil.AccessDenied as e:
        logger.warning("Cannot inspect network connections: %s", e)
        return False

    pids = {c.pid for c in conns
            if c.pid and c.laddr and c.laddr.port == port and c.status == psutil.CONN_LISTEN}
    pids.discard(os.getpid())

    procs = []
    for pid in sorted(pids):
        try:
            proc = psutil.Process(pid)
            logger.warning("Stopping existing process %s (PID %d) on port %d", proc.name(), pid, port)
            proc.terminate()
            procs.append(proc)
        except psutil.NoSuchProcess:
            continue
        except psutil.AccessDenied as e:
            logger.warning("Not allowed to stop PID %d: %s", pid, e)

    if not procs:
        return False
    _, alive = psutil.wait_procs(procs, timeout=timeout)
    for proc in alive:
        try:
            proc.kill()
        except (psutil.NoSuchProcess, psutil.AccessDenied) as e:
            logger.warning("Could not kill PID %d: %s", proc.pid, e)
    return True


def open_browser(url: str, delay: float = 1.0) -> threading.Timer:
    """Open url in the default browser once the server has had time to start listening."""
    timer = threading.Timer(delay, webbrowser.open, args=(url,))
    timer.daemon = True
    timer.start()
    return timer


def viewer_url(settings: Settings, open_file: Path = None) -> str:
    url = f"http://localhost:{settings.port}/"
    if open_file is not None:
        url += "?file=" + quote(open_file.resolve().as_posix())
    return url


def serve(settings: Settings, open_file: Path = None) -> None:
    """Run the viewer until interrupted. Raises RuntimeError when the port cannot be used."""
    if not port_available(settings.host, settings.port):
        logger.warning("Port %d is already in use", settings.port)
        if not settings.reclaim_port:
            raise RuntimeError(f"Port {settings.port} is already in use. Free it or pass --reclaim-port.")
        if not reclaim_port(settings.port):
            raise RuntimeError(f"Could not find the process on port {settings.port}. Please free it manually.")
        time.sleep(1)
        if not port_available(settings.host, settings.port):
            raise RuntimeError(f"Port {settings.port} is still in use after stopping its process. Please free it manually.")

    app = create_app(settings)
    url = viewer_url(settings, open_file)
    logger.info("Doc Viewer running at %s (root: %s)", url, app.config["DOCVIEW_ROOT"])
    if settings.open_browser:
        open_browser(url)
    app.run(host=settings.host, port=settings.port, threaded=True)
