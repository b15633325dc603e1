"""Utility for determining the output filename of an item page."""

from tsdocgen.doc_item import DocItem


def item_filename(item: DocItem) -> str:
    """Return ``<kind-tag>.<name>.html``, e.g. ``class.Foo.html``."""
    return f"{item.kind.tag}.{item.name}.html"
