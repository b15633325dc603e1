"""Closed set of exported declaration shapes produced by the parser adapter."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ClassDecl:
    """``export class Foo {}`` (abstract and ambient classes included)."""

    name: str
    start: int


@dataclass(frozen=True)
class InterfaceDecl:
    """``export interface Foo {}``."""

    name: str
    start: int


@dataclass(frozen=True)
class TypeAliasDecl:
    """``export type Foo = ...``."""

    name: str
    start: int


@dataclass(frozen=True)
class FunctionDecl:
    """``export function foo() {}`` including generators and overload signatures."""

    name: str
    start: int


@dataclass(frozen=True)
class VarBinding:
    """One binding of a variable statement; ``name`` is None for destructuring."""

    name: str | None
    is_function_literal: bool


@dataclass(frozen=True)
class VarDecl:
    """``export const a = 1, b = () => {}``."""

    bindings: tuple[VarBinding, ...]
    start: int


@dataclass(frozen=True)
class OtherDecl:
    """Any exported shape that is not documented (enum, namespace, ...)."""

    shape: str
    start: int


Declaration = (
    ClassDecl | InterfaceDecl | TypeAliasDecl | FunctionDecl | VarDecl | OtherDecl
)
