"""Logic for rendering a single item's page."""

import html

from tsdocgen.doc_item import DocItem
from tsdocgen.html_page import DEFAULT_STYLESHEET, html_page
from tsdocgen.markdown_renderer import render_safe


def render_item_page(item: DocItem, stylesheet: str = DEFAULT_STYLESHEET) -> str:
    """Render a standalone page with the item's name and full description."""
    body = [
        f"<h1>{html.escape(item.name)}</h1>",
        render_safe(item.description or ""),
    ]
    return html_page(item.name, body, stylesheet)
