"""Unit tests for core/markdown/lists.py"""

from docview.core.markdown.blocks import parse
from docview.core.markdown.lists import build_lists
from docview.core.markdown.nodes import ListBlock, ListItem, Text
from docview.core.render import render_document


def _texts(lst: ListBlock) -> list[str]:
    return [item.children[0].text for item in lst.items]


def test_flat_bullet_list():
    [lst] = build_lists(["- a", "- b", "* c", "+ d"])
    assert not lst.ordered
    assert _texts(lst) == ["a", "b", "c", "d"]


def test_ordered_list():
    [lst] = build_lists(["1. one", "2. two"])
    assert lst.ordered
    assert _texts(lst) == ["one", "two"]


def test_task_items(sample_tasks_md):
    [lst] = parse(sample_tasks_md)
    assert [item.checked for item in lst.items] == [True, False]
    assert _texts(lst) == ["done", "todo"]


def test_upper_case_x_is_checked():
    [lst] = build_lists(["- [X] shouted"])
    assert lst.items[0].checked is True


def test_nested_list_attaches_to_last_item():
    [lst] = build_lists(["- a", "  - b", "- c"])
    assert _texts(lst) == ["a", "c"]
    [sub] = lst.items[0].sublists
    assert _texts(sub) == ["b"]
    assert lst.items[1].sublists == ()


def test_nested_list_takes_its_own_type():
    [lst] = build_lists(["- a", "   1. b"])
    assert not lst.ordered
    assert lst.items[0].sublists[0].ordered


def test_dedent_closes_several_levels():
    [lst] = build_lists(["- a", "  - b", "    - c", "- d"])
    assert _texts(lst) == ["a", "d"]
    assert _texts(lst.items[0].sublists[0].items[0].sublists[0]) == ["c"]


def test_dedent_past_first_level_starts_new_list():
    lists = build_lists(["  - a", "- b"])
    assert len(lists) == 2
    assert [_texts(lst) for lst in lists] == [["a"], ["b"]]


def test_blank_line_between_items_keeps_one_list():
    blocks = parse("- a\n\n- b")
    assert len(blocks) == 1
    assert _texts(blocks[0]) == ["a", "b"]


def test_item_without_content_is_skipped():
    assert build_lists(["- "]) == ()


def test_item_inline_content_is_parsed():
    [lst] = build_lists(["- see [x](http://y)"])
    item = lst.items[0]
    assert item.children[0] == Text("see ")
    assert isinstance(item, ListItem)
    assert item.checked is None


def test_nesting_is_capped_at_max_depth():
    """Lines deeper than max_depth open no new list and join the innermost one."""
    [lst] = build_lists(["- a", "  - b", "    - c", "      - d"], max_depth=2)
    [sub] = lst.items[0].sublists
    assert _texts(sub) == ["b", "c", "d"]
    assert all(item.sublists == () for item in sub.items)


def test_parse_forwards_max_depth_to_lists():
    [lst] = parse("- a\n  - b\n    - c", max_depth=2)
    assert _texts(lst.items[0].sublists[0]) == ["b", "c"]


def test_deeply_indented_list_renders():
    """Hundreds of increasing indents render without exhausting the stack."""
    source = "\n".join(" " * k + "- x" for k in range(600))
    out = render_document(source, "md")
    assert out.count("<ul>") == 32
    assert out.count("<li>") == 600
