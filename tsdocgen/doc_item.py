"""Data model for a scraped documentation item."""

from dataclasses import dataclass

from tsdocgen.doc_item_kind import DocItemKind


@dataclass(frozen=True)
class DocItem:
    """Represents one exported declaration and its doc comment."""

    name: str
    kind: DocItemKind
    description: str | None = None  # sanitized comment text, None if uncommented

    def __post_init__(self) -> None:
        """Reject nameless items."""
        if not self.name:
            msg = f"DocItem name must not be empty (kind={self.kind.value})"
            raise ValueError(msg)
