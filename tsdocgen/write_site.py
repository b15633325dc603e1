"""Logic for writing the item pages and the index to disk."""

import logging
from collections.abc import Iterable
from pathlib import Path

from tsdocgen.doc_item import DocItem
from tsdocgen.group_items import group_items
from tsdocgen.html_page import DEFAULT_STYLESHEET
from tsdocgen.item_filename import item_filename
from tsdocgen.render_index_page import render_index_page
from tsdocgen.render_item_page import render_item_page

logger = logging.getLogger(__name__)

INDEX_FILENAME = "index.html"


def write_site(
    items: Iterable[DocItem],
    out_dir: Path,
    *,
    stylesheet: str = DEFAULT_STYLESHEET,
    include_empty: bool = False,
) -> int:
    """Write one page per item plus ``index.html`` into an existing directory.

    Items that share a filename overwrite each other; the last one written
    wins. Any write failure propagates. Returns the number of files written.
    """
    groups = group_items(items, include_empty=include_empty)
    total = sum(len(group) for group in groups.values())
    logger.info("Writing %d item pages...", total)

    written = 0
    seen: set[str] = set()
    for group in groups.values():
        for it in group:
            filename = item_filename(it)
            if filename in seen:
                logger.debug("Overwriting %s with a later %s", filename, it.name)
            seen.add(filename)
            out_file = out_dir / filename
            out_file.write_text(render_item_page(it, stylesheet), encoding="utf-8")
            written += 1

    (out_dir / INDEX_FILENAME).write_text(
        render_index_page(groups, stylesheet), encoding="utf-8"
    )
    return written + 1
