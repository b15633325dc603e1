"""Tests for grouping and sorting documentation items."""

from tsdocgen.doc_item import DocItem
from tsdocgen.doc_item_kind import KIND_ORDER, DocItemKind
from tsdocgen.group_items import group_items


def test_groups_in_fixed_order() -> None:
    """Verify keys follow the fixed kind order and omit empty kinds."""
    items = [
        DocItem("x", DocItemKind.VAR),
        DocItem("Foo", DocItemKind.CLASS),
        DocItem("f", DocItemKind.FUNCTION),
    ]
    groups = group_items(items)
    assert list(groups) == [DocItemKind.CLASS, DocItemKind.FUNCTION, DocItemKind.VAR]


def test_include_empty_groups() -> None:
    """Verify every kind appears when empty groups are requested."""
    groups = group_items([], include_empty=True)
    assert list(groups) == list(KIND_ORDER)
    assert all(group == [] for group in groups.values())


def test_sorted_by_name_lexicographically() -> None:
    """Verify plain code-point ordering within a group."""
    items = [DocItem(n, DocItemKind.CLASS) for n in ["b", "B", "a", "_z"]]
    groups = group_items(items)
    assert [it.name for it in groups[DocItemKind.CLASS]] == ["B", "_z", "a", "b"]


def test_sort_is_stable_for_equal_names() -> None:
    """Verify same-named items keep encounter order."""
    first = DocItem("Foo", DocItemKind.CLASS, "from A")
    second = DocItem("Foo", DocItemKind.CLASS, "from B")
    groups = group_items([second, DocItem("Bar", DocItemKind.CLASS), first])
    assert groups[DocItemKind.CLASS] == [
        DocItem("Bar", DocItemKind.CLASS),
        second,
        first,
    ]
