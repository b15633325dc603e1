"""Shared HTML document shell for generated pages."""

import html

DEFAULT_STYLESHEET = "https://unpkg.com/tachyons@4.12.0/css/tachyons.min.css"


def html_page(
    title: str,
    body: list[str],
    stylesheet: str = DEFAULT_STYLESHEET,
    body_class: str | None = None,
) -> str:
    """Wrap body lines in a standalone HTML document."""
    body_open = f'<body class="{html.escape(body_class)}">' if body_class else "<body>"
    parts = [
        "<!doctype html>",
        '<html lang="en">',
        "<head>",
        '<meta charset="utf-8">',
        f"<title>{html.escape(title)}</title>",
    ]
    if stylesheet:
        parts.append(f'<link rel="stylesheet" href="{html.escape(stylesheet)}" />')
    parts += ["</head>", body_open, *body, "</body>", "</html>"]
    return "\n".join(parts) + "\n"
