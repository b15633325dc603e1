"""Render untrusted markdown to HTML that is safe to embed in a page."""

from collections.abc import Callable

import markdown
import nh3

MARKDOWN_EXTENSIONS = ["tables", "pymdownx.tilde"]
MARKDOWN_EXTENSION_CONFIGS = {
    # ~~text~~ only; a single ~ stays literal like in GitHub markdown.
    "pymdownx.tilde": {"subscript": False},
}
CLEAN_CONTENT_TAGS = {"script", "style"}


def render_markdown(text: str) -> str:
    """Convert markdown (tables and strikethrough enabled) to raw HTML."""
    return markdown.markdown(
        text,
        extensions=MARKDOWN_EXTENSIONS,
        extension_configs=MARKDOWN_EXTENSION_CONFIGS,
    )


def sanitize_html(html: str) -> str:
    """Strip tags and attributes outside the allow-list."""
    return nh3.clean(html, clean_content_tags=CLEAN_CONTENT_TAGS)


def render_safe(
    text: str,
    *,
    to_html: Callable[[str], str] = render_markdown,
    clean: Callable[[str], str] = sanitize_html,
) -> str:
    """Render markdown and sanitize the result before it is embedded.

    Doc comments may come from code the user does not control, so the
    markdown engine's output is never trusted as-is.
    """
    if not text:
        return ""
    return clean(to_html(text))
