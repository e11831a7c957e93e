"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from docview.config import Settings, load_config
from docview.core.classify import is_text_file
from docview.core.fs import FileAccessError, list_dir, read_file
from docview.core.render import render_document
from docview.server.launch import AccessLog, serve


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling and configure logging from it."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    return settings


def _format_size(size: int) -> str:
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"


def serve_cmd(
    root: Annotated[Optional[str], typer.Argument(help="Directory to expose (default: current directory)")] = None,
    port: Annotated[Optional[int], typer.Option("--port", "-p", help="Port to listen on")] = None,
    host: Annotated[Optional[str], typer.Option("--host", help="Interface to bind")] = None,
    no_open: Annotated[bool, typer.Option("--no-open", help="Do not open a browser")] = False,
    reclaim: Annotated[bool, typer.Option("--reclaim-port", help="Stop whatever already listens on the port")] = False,
    ):
    """Serve a directory tree in the browser viewer."""
    settings = _settings(overrides={
        "root_dir": root, "port": port, "host": host,
        "open_browser": False if no_open else None,
        "reclaim_port": True if reclaim else None,
    })
    if not Path(settings.root_dir).expanduser().is_dir():
        _fail(f"Not a directory: {settings.root_dir}")
    try:
        serve(settings)
    except RuntimeError as e:
        _fail(str(e))


def open_cmd(
    path: Annotated[str, typer.Argument(help="Text file to open in the viewer")],
    port: Annotated[Optional[int], typer.Option("--port", "-p", help="Port to listen on")] = None,
    no_open: Annotated[bool, typer.Option("--no-open", help="Do not open a browser")] = False,
    ):
    """Validate a file, record it in the access log, and serve its directory with the file open."""
    settings = _settings(overrides={"port": port, "open_browser": False if no_open else None})
    file_path = Path(path).expanduser().resolve()
    ext = file_path.suffix.lower()
    log = AccessLog(settings.access_log)

    if not file_path.is_file():
        log.rejected(file_path, ext, "not_found")
        _fail(f"File not found: {file_path}")
    if not is_text_file(file_path.name):
        log.rejected(file_path, ext, "unsupported")
        _fail(f"Unsupported file type: {ext or file_path.name} ({file_path})")

    log.opened(file_path, ext)
    settings.root_dir = file_path.parent.as_posix()
    try:
        serve(settings, open_file=file_path)
    except RuntimeError as e:
        _fail(str(e))


def render_cmd(
    path: Annotated[str, typer.Argument(help="File to render")],
    out: Annotated[Optional[str], typer.Option("--out", "-o", help="Write markup here instead of stdout")] = None,
    ):
    """Render a file to HTML markup (markdown or numbered raw lines)."""
    settings = _settings()
    file_path = Path(path).expanduser().resolve()
    try:
        doc = read_file(file_path, file_path.parent, settings.max_file_size)
    except FileAccessError as e:
        _fail(str(e))
    if doc.content is None:
        _fail(f"{doc.name}: {doc.error}")

    markup = render_document(doc.content, doc.ext, max_depth=settings.max_quote_depth)
    if out:
        Path(out).write_text(markup, encoding="utf-8")
        typer.echo(f"  {doc.path} -> {out}")
    else:
        typer.echo(markup)


def classify_cmd(
    names: Annotated[list[str], typer.Argument(help="File names to classify")],
    ):
    """Report whether each file name is previewed as text or treated as binary."""
    for name in names:
        typer.echo(f"{'text' if is_text_file(name) else 'binary':<7}{name}")


def list_cmd(
    path: Annotated[Optional[str], typer.Argument(help="Directory to list (default: root_dir)")] = None,
    show_all: Annotated[bool, typer.Option("--all", "-a", help="Include hidden entries")] = False,
    ):
    """List a directory the way the viewer's sidebar shows it."""
    settings = _settings()
    root = Path(path or settings.root_dir).expanduser()
    try:
        listing = list_dir(None, root)
    except FileAccessError as e:
        _fail(str(e))

    shown = [i for i in listing.items if show_all or settings.show_hidden or not i.hidden]
    if not shown:
        typer.echo("No entries found.")
        raise typer.Exit(1)
    for item in shown:
        size = "" if item.size is None else _format_size(item.size)
        marker = "d" if item.type == "dir" else "-"
        typer.echo(f"{marker} {size:>10}  {item.name}")
