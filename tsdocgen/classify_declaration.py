"""Logic for turning exported declarations into documentation items."""

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
from tsdocgen.doc_item import DocItem
from tsdocgen.doc_item_kind import DocItemKind


def classify_declaration(decl: Declaration, description: str | None) -> list[DocItem]:
    """Produce the documentation items for one exported declaration.

    Variable statements yield one item per simple-identifier binding, all
    sharing ``description``. Enums, namespaces and other shapes yield nothing.
    """
    if isinstance(decl, ClassDecl):
        return [DocItem(decl.name, DocItemKind.CLASS, description)]
    if isinstance(decl, TypeAliasDecl):
        return [DocItem(decl.name, DocItemKind.TYPE_ALIAS, description)]
    if isinstance(decl, InterfaceDecl):
        return [DocItem(decl.name, DocItemKind.INTERFACE, description)]
    if isinstance(decl, FunctionDecl):
        return [DocItem(decl.name, DocItemKind.FUNCTION, description)]
    if isinstance(decl, VarDecl):
        return [
            DocItem(binding.name, _binding_kind(binding), description)
            for binding in decl.bindings
            if binding.name
        ]
    if isinstance(decl, OtherDecl):
        return []
    msg = f"Unknown declaration shape: {type(decl).__name__}"
    raise TypeError(msg)


def _binding_kind(binding: VarBinding) -> DocItemKind:
    return DocItemKind.FUNCTION if binding.is_function_literal else DocItemKind.VAR
