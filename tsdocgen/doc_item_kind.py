"""Classification tags for documentation items."""

from enum import Enum


class DocItemKind(Enum):
    """Kind of an exported declaration (Class/Interface/TypeAlias/Function/Var)."""

    CLASS = "Class"
    INTERFACE = "Interface"
    TYPE_ALIAS = "TypeAlias"
    FUNCTION = "Function"
    VAR = "Var"

    @property
    def tag(self) -> str:
        """Lowercase token used in output filenames."""
        return _TAGS[self]

    @property
    def heading(self) -> str:
        """Plural heading used on the index page."""
        return _HEADINGS[self]


_TAGS = {
    DocItemKind.CLASS: "class",
    DocItemKind.INTERFACE: "interface",
    DocItemKind.TYPE_ALIAS: "type",
    DocItemKind.FUNCTION: "function",
    DocItemKind.VAR: "var",
}

_HEADINGS = {
    DocItemKind.CLASS: "Classes",
    DocItemKind.INTERFACE: "Interfaces",
    DocItemKind.TYPE_ALIAS: "Type Aliases",
    DocItemKind.FUNCTION: "Functions",
    DocItemKind.VAR: "Variables",
}

KIND_ORDER: tuple[DocItemKind, ...] = (
    DocItemKind.CLASS,
    DocItemKind.INTERFACE,
    DocItemKind.TYPE_ALIAS,
    DocItemKind.FUNCTION,
    DocItemKind.VAR,
)
