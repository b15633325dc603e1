"""Utility for extracting the summary line(s) of a description."""

from tsdocgen.doc_item import DocItem


def short_description(item: DocItem) -> str | None:
    """Join the lines before the first blank line with single spaces."""
    if item.description is None:
        return None
    lines: list[str] = []
    for line in item.description.splitlines():
        if not line.strip():
            break
        lines.append(line)
    return " ".join(lines)
