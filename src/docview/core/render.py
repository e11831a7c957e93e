"""Renderer facade: pick markdown or raw rendering by extension"""

from docview.core.classify import is_markdown, is_text_file
from docview.core.markdown.blocks import DEFAULT_MAX_DEPTH
from docview.core.markdown.emit import render_markdown
from docview.core.raw import render_raw


def classify(name: str) -> bool:
    """Return True when the named file is previewable text."""
    return is_text_file(name)


def render_document(content: str, extension: str, max_depth: int = DEFAULT_MAX_DEPTH) -> str:
    """Render file content to markup: parsed markdown for markdown files, numbered raw lines otherwise."""
    ext = (extension or '').lstrip('.').lower()
    if is_markdown(ext):
        return f'<div class="md-rendered">{render_markdown(content, max_depth=max_depth)}</div>'
    return render_source(content, ext)


def render_source(content: str, extension: str) -> str:
    """Render file content as numbered raw lines regardless of type (markdown source view)."""
    return f'<div class="raw-view">{render_raw(content, (extension or "").lstrip(".").lower())}</div>'
