"""Logic for rendering the index page that links every item."""

import html

from tsdocgen.doc_item import DocItem
from tsdocgen.doc_item_kind import DocItemKind
from tsdocgen.html_page import DEFAULT_STYLESHEET, html_page
from tsdocgen.item_filename import item_filename
from tsdocgen.markdown_renderer import render_safe
from tsdocgen.short_description import short_description

INDEX_TITLE = "Index"
INDEX_BODY_CLASS = "light-gray bg-dark-blue"


def render_index_page(
    groups: dict[DocItemKind, list[DocItem]],
    stylesheet: str = DEFAULT_STYLESHEET,
) -> str:
    """Render the index: one heading per kind group, one row per item."""
    parts: list[str] = []
    for kind, items in groups.items():
        parts.append(f"<h2>{kind.heading}</h2>")
        parts.append('<div class="dt">')
        for it in items:
            href = html.escape(item_filename(it))
            summary = render_safe(short_description(it) or "")
            parts += [
                '<div class="dt-row">',
                '<div class="dtc pr3">',
                f'<a class="link light-gray" href="{href}">{html.escape(it.name)}</a>',
                "</div>",
                '<div class="dtc">',
                summary,
                "</div>",
                "</div>",
            ]
        parts.append("</div>")
    return html_page(INDEX_TITLE, parts, stylesheet, body_class=INDEX_BODY_CLASS)
