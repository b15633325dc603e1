"""Tests for rendering untrusted markdown to safe HTML."""

from tsdocgen.markdown_renderer import render_markdown, render_safe, sanitize_html


def test_paragraphs() -> None:
    """Verify blank lines separate paragraphs."""
    html = render_safe("Represents a foo.\n\nMore text")
    assert "<p>Represents a foo.</p>" in html
    assert "<p>More text</p>" in html


def test_strikethrough_extension() -> None:
    """Verify ~~text~~ renders as a deletion."""
    assert "<del>gone</del>" in render_safe("this is ~~gone~~")


def test_single_tilde_is_literal() -> None:
    """Verify single tildes are not treated as subscript."""
    html = render_safe("H~2~O")
    assert "<sub>" not in html
    assert "H~2~O" in html


def test_table_extension() -> None:
    """Verify pipe tables render as HTML tables."""
    html = render_safe("| a | b |\n| --- | --- |\n| 1 | 2 |")
    assert "<table>" in html
    assert "<th>a</th>" in html
    assert "<td>2</td>" in html


def test_script_is_removed() -> None:
    """Verify script tags and their content never reach the output."""
    html = render_safe("Hi <script>alert(1)</script> there")
    assert "<script" not in html
    assert "alert(1)" not in html
    assert "Hi" in html


def test_event_handlers_are_removed() -> None:
    """Verify inline event handler attributes are stripped."""
    html = render_safe('<img src="x.png" onerror="alert(1)">')
    assert "onerror" not in html


def test_javascript_links_are_neutralized() -> None:
    """Verify javascript: URLs are dropped from links."""
    html = render_safe("[click](javascript:alert)")
    assert "javascript:" not in html
    assert "click" in html


def test_raw_markdown_output_is_not_trusted() -> None:
    """Verify the markdown engine alone passes raw HTML through."""
    raw = render_markdown("<script>x()</script>")
    assert "<script>" in raw
    assert "<script>" not in sanitize_html(raw)


def test_empty_input() -> None:
    """Verify empty text renders to empty HTML."""
    assert render_safe("") == ""


def test_collaborators_are_swappable() -> None:
    """Verify both stages can be replaced and still run in order."""
    calls: list[str] = []

    def to_html(text: str) -> str:
        calls.append("markdown")
        return f"<b>{text}</b><script>bad()</script>"

    def clean(html: str) -> str:
        calls.append("sanitize")
        return html.replace("<script>bad()</script>", "")

    assert render_safe("x", to_html=to_html, clean=clean) == "<b>x</b>"
    assert calls == ["markdown", "sanitize"]
