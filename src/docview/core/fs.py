"""Directory listing and file reads confined to a root directory"""

import logging
from datetime import datetime, timezone
from pathlib import Path

from docview.core.classify import get_ext, is_hidden, is_text_file
from docview.core.models import DirEntry, DirListing, FileContent


logger = logging.getLogger(__name__)

MAX_FILE_SIZE = 1024 * 1024


class FileAccessError(Exception):
    """A path could not be listed or read; status is the matching HTTP status code."""
    status = 400


class AccessDenied(FileAccessError):
    """The requested path resolves outside the root directory."""
    status = 403


def resolve_within(path: str | Path | None, root: Path) -> Path:
    """Resolve path (relative paths against root) and check it lies inside root."""
    root = root.resolve()
    target = (root / path).resolve() if path else root
    if not is_path_safe(target, root):
        raise AccessDenied("Access denied")
    return target


def is_path_safe(path: Path, root: Path) -> bool:
    """Return True if path is root itself or lies beneath it."""
    return path == root or root in path.parents


def _modified(stat) -> str:
    return datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc).isoformat()


def list_dir(path: str | Path | None, root: Path) -> DirListing:
    """List a directory under root: directories first, then files, each sorted by name."""
    root = root.resolve()
    target = resolve_within(path, root)
    if not target.exists():
        raise FileAccessError(f"Cannot read directory: {target} does not exist")
    if not target.is_dir():
        raise FileAccessError("Not a directory")

    items: list[DirEntry] = []
    try:
        children = list(target.iterdir())
    except OSError as e:
        raise FileAccessError(f"Cannot read directory: {e}") from e

    for child in children:
        try:
            st = child.stat()
            is_dir = child.is_dir()
        except OSError as e:
            logger.debug("Skipping unreadable entry %s: %s", child, e)
            continue
        items.append(DirEntry(
            name=child.name,
            type="dir" if is_dir else "file",
            modified=_modified(st),
            hidden=is_hidden(child.name),
            size=None if is_dir else st.st_size,
        ))

    items.sort(key=lambda e: (e.type != "dir", e.name.lower(), e.name))
    parent = target.parent if target != root else None
    return DirListing(
        path=target.as_posix(),
        parent=parent.as_posix() if parent is not None else None,
        items=items,
    )


def read_file(path: str | Path | None, root: Path, max_size: int = MAX_FILE_SIZE) -> FileContent:
    """Read a text file under root for preview.

    Over-size and non-text files come back with content=None and an error
    message instead of raising; missing paths and directories raise.
    """
    if not path:
        raise FileAccessError("Path required")
    target = resolve_within(path, root)
    if not target.exists():
        raise FileAccessError(f"Cannot read file: {target} does not exist")
    if target.is_dir():
        raise FileAccessError("Is a directory")

    size = target.stat().st_size
    result = FileContent(path=target.as_posix(), name=target.name, ext=get_ext(target.name), size=size)

    if size > max_size:
        result.error = (f"File too large (max {max_size / 1024 / 1024:.1f}MB). "
                        f"Size: {size / 1024 / 1024:.1f}MB")
        return result
    if not is_text_file(target.name):
        result.error = "Binary file - preview not available"
        return result

    try:
        result.content = target.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise FileAccessError(f"Cannot read file: {e}") from e
    return result
