"""Logic for grouping documentation items by kind."""

from collections.abc import Iterable

from tsdocgen.doc_item import DocItem
from tsdocgen.doc_item_kind import KIND_ORDER, DocItemKind


def group_items(
    items: Iterable[DocItem], *, include_empty: bool = False
) -> dict[DocItemKind, list[DocItem]]:
    """Group items in fixed kind order, each group sorted by name.

    Sorting is stable, so items sharing a name keep their scrape order.
    """
    by_kind: dict[DocItemKind, list[DocItem]] = {kind: [] for kind in KIND_ORDER}
    for it in items:
        by_kind[it.kind].append(it)
    return {
        kind: sorted(group, key=lambda it: it.name)
        for kind, group in by_kind.items()
        if group or include_empty
    }
