"""Parser-independent view of one source file."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from tsdocgen.declarations import Declaration


class CommentTable:
    """Lookup of leading comment blocks by source position."""

    def __init__(self, leading: Mapping[int, list[str]] | None = None) -> None:
        """Build the table from ``position -> [comment text, closest first]``."""
        self._leading = {pos: list(texts) for pos, texts in (leading or {}).items()}

    def leading(self, position: int) -> list[str]:
        """Return the comments attached right before ``position``, closest first."""
        return list(self._leading.get(position, []))

    def __len__(self) -> int:
        return len(self._leading)


@dataclass
class ParsedModule:
    """Exported top-level declarations of a file plus its comment table."""

    path: Path
    declarations: list[Declaration] = field(default_factory=list)
    comments: CommentTable = field(default_factory=CommentTable)
