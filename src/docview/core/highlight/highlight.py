"""Syntax highlighting entry points for code fences and raw-view lines"""

from docview.core.highlight.rules import (
    BLOCK_CLASSES, BLOCK_RULES, LANGUAGE_ALIASES, LINE_CLASSES, LINE_RULES,
)
from docview.core.highlight.tokens import Token, render_tokens, scan


def normalize_language(tag: str | None) -> str:
    """Map a language tag or file extension to its rule-set name (e.g. 'ts' -> 'javascript')."""
    tag = (tag or '').strip().lower()
    return LANGUAGE_ALIASES.get(tag, tag)


def tokenize(code: str, language: str | None) -> list[Token]:
    """Return the block-style token intervals for code; empty for unsupported languages."""
    return scan(code, BLOCK_RULES.get(normalize_language(language), ()))


def highlight(code: str, language: str | None) -> str:
    """Return escaped code with `hljs-*` spans; unsupported languages are only escaped."""
    return render_tokens(code, tokenize(code, language), BLOCK_CLASSES)


def highlight_line(line: str, language: str | None) -> str:
    """Return one escaped raw-view line with `tok-*` spans."""
    rules = LINE_RULES.get(normalize_language(language), ())
    return render_tokens(line, scan(line, rules), LINE_CLASSES)
