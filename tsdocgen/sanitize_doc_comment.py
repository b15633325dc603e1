"""Logic for stripping comment decoration from raw doc comments."""

COMMENT_DECORATION = " *"


def _strip_once(text: str) -> str:
    lines = [line.lstrip(COMMENT_DECORATION) for line in text.splitlines()]
    return "\n".join(lines).strip()


def sanitize_doc_comment(raw: str) -> str:
    """Remove leading spaces/asterisks from each line and trim the result.

    Blank lines inside the comment are kept since they separate markdown
    paragraphs. The transform is repeated until stable, so trimming a leading
    tab or newline can never expose a fresh ``*`` run to a later call.
    """
    text = raw
    while True:
        cleaned = _strip_once(text)
        if cleaned == text:
            return cleaned
        text = cleaned
