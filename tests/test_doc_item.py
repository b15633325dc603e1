"""Tests for the documentation item model and its naming helpers."""

import dataclasses

import pytest

from tsdocgen.doc_item import DocItem
from tsdocgen.doc_item_kind import KIND_ORDER, DocItemKind
from tsdocgen.item_filename import item_filename
from tsdocgen.short_description import short_description


def test_empty_name_rejected() -> None:
    """Verify that an item cannot be built without a name."""
    with pytest.raises(ValueError, match="must not be empty"):
        DocItem("", DocItemKind.CLASS)


def test_item_is_immutable() -> None:
    """Verify that items cannot be mutated after construction."""
    it = DocItem("Foo", DocItemKind.CLASS, "doc")
    with pytest.raises(dataclasses.FrozenInstanceError):
        it.name = "Bar"  # type: ignore[misc]


def test_kind_order() -> None:
    """Verify the fixed kind order used for grouping."""
    assert [k.value for k in KIND_ORDER] == [
        "Class",
        "Interface",
        "TypeAlias",
        "Function",
        "Var",
    ]


def test_item_filename() -> None:
    """Verify filenames are built from the kind tag and the name."""
    assert item_filename(DocItem("Foo", DocItemKind.CLASS)) == "class.Foo.html"
    assert item_filename(DocItem("Foo", DocItemKind.TYPE_ALIAS)) == "type.Foo.html"
    assert item_filename(DocItem("Foo", DocItemKind.INTERFACE)) == "interface.Foo.html"
    assert item_filename(DocItem("foo", DocItemKind.FUNCTION)) == "function.foo.html"
    assert item_filename(DocItem("foo", DocItemKind.VAR)) == "var.foo.html"


def test_item_filename_deterministic_and_distinct_per_kind() -> None:
    """Verify the same (kind, name) maps to one file and kinds never collide."""
    a = DocItem("Foo", DocItemKind.CLASS, "first")
    b = DocItem("Foo", DocItemKind.CLASS, "second")
    assert item_filename(a) == item_filename(b)
    names = {item_filename(DocItem("Foo", kind)) for kind in DocItemKind}
    assert len(names) == len(DocItemKind)


def test_short_description_stops_at_blank_line() -> None:
    """Verify that only the first paragraph is used."""
    it = DocItem("Foo", DocItemKind.CLASS, "Line one.\n\nMore text.")
    assert short_description(it) == "Line one."


def test_short_description_joins_lines() -> None:
    """Verify that a description without blank lines is joined with spaces."""
    it = DocItem("Foo", DocItemKind.CLASS, "Line one\ncontinues here.")
    assert short_description(it) == "Line one continues here."


def test_short_description_missing() -> None:
    """Verify that absent and empty descriptions give nothing to show."""
    assert short_description(DocItem("Foo", DocItemKind.CLASS)) is None
    assert short_description(DocItem("Foo", DocItemKind.CLASS, "")) == ""
