"""List building from collected list lines using an indentation stack"""

import re
from dataclasses import dataclass, field
from typing import Optional

from docview.core.markdown.inline import parse_inline
from docview.core.markdown.nodes import ListBlock, ListItem


LIST_START_RE = re.compile(r'^(\s*)(?:[-*+]|\d+\.)\s+')
TASK_RE = re.compile(r'^(\s*)[-*+]\s+\[([ xX])\]\s+(.+)')
BULLET_RE = re.compile(r'^(\s*)[-*+]\s+(.+)')
ORDERED_RE = re.compile(r'^(\s*)\d+\.\s+(.+)')

MAX_LIST_DEPTH = 32


@dataclass
class _OpenItem:
    text: str
    checked: Optional[bool]
    sublists: list["_OpenList"] = field(default_factory=list)


@dataclass
class _OpenList:
    ordered: bool
    indent: int
    items: list[_OpenItem] = field(default_factory=list)


def _freeze(lst: _OpenList) -> ListBlock:
    return ListBlock(
        ordered=lst.ordered,
        items=tuple(
            ListItem(
                children=parse_inline(item.text),
                checked=item.checked,
                sublists=tuple(_freeze(sub) for sub in item.sublists),
            )
            for item in lst.items
        ),
    )


def _marker(line: str) -> tuple[int, bool, Optional[bool], str] | None:
    """Return (indent, ordered, checked, content) for a list line, or None if it has no content."""
    if m := TASK_RE.match(line):
        return len(m.group(1)), False, m.group(2) != ' ', m.group(3)
    if m := BULLET_RE.match(line):
        return len(m.group(1)), False, None, m.group(2)
    if m := ORDERED_RE.match(line):
        return len(m.group(1)), True, None, m.group(2)
    return None


def build_lists(lines: list[str], max_depth: int = MAX_LIST_DEPTH) -> tuple[ListBlock, ...]:
    """Build list blocks from consecutive list lines.

    Deeper indentation opens a nested list of that line's type under the last
    item; shallower indentation closes nested lists back to the first level
    that is not deeper; equal indentation adds a sibling item. Closing past
    the outermost level starts a new top-level list. Once max_depth lists are
    open, deeper lines become siblings in the innermost list.
    """
    roots: list[_OpenList] = []
    stack: list[_OpenList] = []

    for line in lines:
        parsed = _marker(line)
        if parsed is None:
            continue
        indent, ordered, checked, content = parsed

        while stack and indent < stack[-1].indent:
            stack.pop()

        if not stack:
            opened = _OpenList(ordered=ordered, indent=indent)
            roots.append(opened)
            stack.append(opened)
        elif indent > stack[-1].indent and len(stack) < max_depth:
            opened = _OpenList(ordered=ordered, indent=indent)
            stack[-1].items[-1].sublists.append(opened)
            stack.append(opened)

        stack[-1].items.append(_OpenItem(text=content, checked=checked))

    return tuple(_freeze(lst) for lst in roots)
