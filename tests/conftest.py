"""Root test configuration: a small document tree and settings pointing at it"""

import pytest

from docview.config import Settings


@pytest.fixture(name="doc_root")
def doc_root_fixture(tmp_path):
    """A directory with markdown, text, binary, hidden and nested entries."""
    root = tmp_path / "docs"
    root.mkdir()
    (root / "README.md").write_text("# Hello\n\nWorld with **bold**.\n")
    (root / "notes.txt").write_text("line one\nline two\n")
    (root / "image.png").write_bytes(b"\x89PNG\r\n\x1a\n\x00\x00")
    (root / ".env").write_text("SECRET=1\n")
    (root / "sub").mkdir()
    (root / "sub" / "app.py").write_text("def main():\n    return 1\n")
    return root


@pytest.fixture(name="settings")
def settings_fixture(doc_root, tmp_path):
    return Settings(
        root_dir=str(doc_root),
        open_browser=False,
        access_log=str(tmp_path / "access.jsonl"),
    )
