"""Adapter that turns TypeScript source into a ParsedModule using tree-sitter."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING

import tree_sitter_typescript
from tree_sitter import Language, Parser

from tsdocgen.declarations import (
    ClassDecl,
    Declaration,
    FunctionDecl,
    InterfaceDecl,
    OtherDecl,
    TypeAliasDecl,
    VarBinding,
    VarDecl,
)
from tsdocgen.errors import SourceParseError
from tsdocgen.parsed_module import CommentTable, ParsedModule

if TYPE_CHECKING:
    from tree_sitter import Node

CLASS_NODES = {"class_declaration", "abstract_class_declaration"}
FUNCTION_NODES = {
    "function_declaration",
    "generator_function_declaration",
    "function_signature",
}
VARIABLE_NODES = {"lexical_declaration", "variable_declaration"}
FUNCTION_LITERAL_NODES = {
    "arrow_function",
    "function_expression",
    "function",
    "generator_function",
}


@lru_cache(maxsize=2)
def _parser(tsx: bool) -> Parser:
    lang = (
        tree_sitter_typescript.language_tsx()
        if tsx
        else tree_sitter_typescript.language_typescript()
    )
    return Parser(Language(lang))


def parse_typescript(source: str | bytes, path: Path) -> ParsedModule:
    """Parse a TypeScript module and collect its exported declarations.

    Raises SourceParseError at the first syntax error in the file.
    """
    data = source.encode("utf-8") if isinstance(source, str) else source
    tree = _parser(path.suffix.lower() == ".tsx").parse(data)
    root = tree.root_node
    if root.has_error:
        _raise_first_error(root, path)

    declarations: list[Declaration] = []
    leading: dict[int, list[str]] = {}
    children = root.children
    for idx, node in enumerate(children):
        if node.type != "export_statement":
            continue
        decl = _export_declaration(node, data)
        if decl is None:
            continue
        declarations.append(decl)
        comments = _leading_comments(children, idx, data)
        if comments:
            leading[node.start_byte] = comments

    return ParsedModule(
        path=path, declarations=declarations, comments=CommentTable(leading)
    )


def _text(node: Node, data: bytes) -> str:
    return data[node.start_byte : node.end_byte].decode("utf-8")


def _raise_first_error(root: Node, path: Path) -> None:
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            row, column = node.start_point
            if node.is_missing:
                message = f"missing {node.type}"
            else:
                message = "unexpected syntax"
            raise SourceParseError(path, row + 1, column + 1, message)
        # Reverse so the leftmost child is visited first.
        stack.extend(reversed(node.children))


def _export_declaration(node: Node, data: bytes) -> Declaration | None:
    """Map an export_statement to a declaration shape; None for re-exports."""
    if any(child.type == "default" for child in node.children):
        return None
    decl = node.child_by_field_name("declaration")
    if decl is None:
        return None
    if decl.type == "ambient_declaration":
        inner = [c for c in decl.named_children if c.type != "comment"]
        if not inner:
            return OtherDecl(shape=decl.type, start=node.start_byte)
        decl = inner[0]
    return _declaration_shape(decl, node.start_byte, data)


def _declaration_shape(decl: Node, start: int, data: bytes) -> Declaration:
    kind = decl.type
    name_node = decl.child_by_field_name("name")
    name = _text(name_node, data) if name_node is not None else ""

    if kind in CLASS_NODES and name:
        return ClassDecl(name=name, start=start)
    if kind == "interface_declaration" and name:
        return InterfaceDecl(name=name, start=start)
    if kind == "type_alias_declaration" and name:
        return TypeAliasDecl(name=name, start=start)
    if kind in FUNCTION_NODES and name:
        return FunctionDecl(name=name, start=start)
    if kind in VARIABLE_NODES:
        bindings = tuple(
            _binding(declarator, data)
            for declarator in decl.named_children
            if declarator.type == "variable_declarator"
        )
        return VarDecl(bindings=bindings, start=start)
    return OtherDecl(shape=kind, start=start)


def _binding(declarator: Node, data: bytes) -> VarBinding:
    name_node = declarator.child_by_field_name("name")
    value = declarator.child_by_field_name("value")
    name = None
    if name_node is not None and name_node.type == "identifier":
        name = _text(name_node, data)
    return VarBinding(
        name=name,
        is_function_literal=value is not None and value.type in FUNCTION_LITERAL_NODES,
    )


def _leading_comments(siblings: list[Node], idx: int, data: bytes) -> list[str]:
    """Collect comment siblings directly before ``siblings[idx]``, closest first."""
    found: list[Node] = []
    j = idx - 1
    while j >= 0 and siblings[j].type == "comment":
        found.append(siblings[j])
        j -= 1
    if j >= 0:
        # Comments sharing a line with the previous statement trail it.
        prev_end_row = siblings[j].end_point[0]
        found = [c for c in found if c.start_point[0] != prev_end_row]
    return [_comment_body(_text(c, data)) for c in found]


def _comment_body(text: str) -> str:
    """Drop the comment delimiters, keeping the decoration for the sanitizer."""
    if text.startswith("/*"):
        return text[2:-2] if text.endswith("*/") else text[2:]
    if text.startswith("//"):
        return text[2:]
    return text
