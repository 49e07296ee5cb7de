"""Intermediate representation (IR) of generated SwiftUI code."""

from swiftship.ir.lib import (
    SWIFT_KEYWORDS,
    ActionBlock,
    Argument,
    ArrayLit,
    Assign,
    BindingRef,
    BoolLit,
    Call,
    Conditional,
    Container,
    EdgeKind,
    EntryFile,
    EnumCase,
    EnvironmentDecl,
    HelperFunc,
    Identifier,
    Labeled,
    Leaf,
    ModelFile,
    Modified,
    ModifierExpr,
    NavigationEdge,
    NumberLit,
    ParameterDecl,
    PropertyDecl,
    RangeLit,
    RouteCase,
    RouteRef,
    StateDecl,
    StringLit,
    UiExpr,
    ValueExpr,
    ViewFile,
    camel_case,
    pascal_case,
)

__all__ = [
    # Values
    "StringLit",
    "NumberLit",
    "BoolLit",
    "EnumCase",
    "Identifier",
    "BindingRef",
    "Argument",
    "Call",
    "ArrayLit",
    "RangeLit",
    "RouteRef",
    "Assign",
    "ActionBlock",
    "ValueExpr",
    # Views
    "Leaf",
    "Labeled",
    "Container",
    "ModifierExpr",
    "Modified",
    "Conditional",
    "UiExpr",
    # Files
    "EdgeKind",
    "NavigationEdge",
    "StateDecl",
    "EnvironmentDecl",
    "ParameterDecl",
    "HelperFunc",
    "PropertyDecl",
    "ViewFile",
    "ModelFile",
    "RouteCase",
    "EntryFile",
    # Names
    "SWIFT_KEYWORDS",
    "pascal_case",
    "camel_case",
]
