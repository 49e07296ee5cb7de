"""Intermediate representation between the builder and the printer.

The IR mirrors SwiftUI constructs closely enough that printing is purely
syntactic. Every union below is closed: the printer matches each variant
explicitly and has no default branch.

Value expressions (``ValueExpr``) are the arguments of views and
modifiers. View expressions (``UiExpr``) compose into a screen body.
File-level declarations describe one output file each.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Union

from swiftship.definition import SWIFT_KEYWORDS, BindingSource
from swiftship.tokens import TokenValue

# =============================================================================
# Value expressions
# =============================================================================


@dataclass(frozen=True)
class StringLit:
    value: str


@dataclass(frozen=True)
class NumberLit:
    value: float


@dataclass(frozen=True)
class BoolLit:
    value: bool


@dataclass(frozen=True)
class EnumCase:
    """Implicit member expression, printed as ``.name``."""

    name: str


@dataclass(frozen=True)
class Identifier:
    """A name printed verbatim (``nil``, ``route``, ``Int.max``)."""

    name: str


@dataclass(frozen=True)
class BindingRef:
    """Reference into a binding source.

    Attributes:
        source: Source kind the path resolves in.
        path: Swift member path (``todoItem.title``).
        two_way: Print as a ``Binding`` projection (``$path``).
        interpolate: Print as a string interpolation (``"\\(path)"``).
    """

    source: BindingSource
    path: str
    two_way: bool = False
    interpolate: bool = False


@dataclass(frozen=True)
class Argument:
    """One call argument; ``label`` is None for unlabeled arguments."""

    label: str | None
    value: "ValueExpr"


@dataclass(frozen=True)
class Call:
    """A function or initializer call (``URL(string: "...")``, ``.flexible()``)."""

    callee: str
    arguments: tuple[Argument, ...] = ()


@dataclass(frozen=True)
class ArrayLit:
    items: tuple["ValueExpr", ...] = ()


@dataclass(frozen=True)
class RangeLit:
    """Closed range ``lower...upper``."""

    lower: "ValueExpr"
    upper: "ValueExpr"


@dataclass(frozen=True)
class RouteRef:
    """A navigation route value, printed as ``AppRoute.<case>``."""

    case: str
    screen_id: str


@dataclass(frozen=True)
class Assign:
    """Statement ``target = value`` inside an action block."""

    target: str
    value: "ValueExpr"


@dataclass(frozen=True)
class ActionBlock:
    """A closure of statements; a final unlabeled one prints as trailing."""

    statements: tuple[Union[Call, Assign], ...] = ()


ValueExpr = Union[
    StringLit,
    NumberLit,
    BoolLit,
    EnumCase,
    Identifier,
    TokenValue,
    BindingRef,
    Call,
    ArrayLit,
    RangeLit,
    RouteRef,
    ActionBlock,
]


# =============================================================================
# View expressions
# =============================================================================


@dataclass(frozen=True)
class Leaf:
    """A view without child content (``Text("Hi")``, ``Toggle(...)``).

    Attributes:
        kind: SwiftUI view type.
        value: Leading unlabeled argument, if any.
        arguments: Remaining arguments.
        state_ref: Binding the view reads or writes, if any.
    """

    kind: str
    value: ValueExpr | None = None
    arguments: tuple[Argument, ...] = ()
    state_ref: BindingRef | None = None


@dataclass(frozen=True)
class Labeled:
    """A labeled trailing closure (``header: { ... }``)."""

    label: str
    children: tuple["UiExpr", ...]


@dataclass(frozen=True)
class Container:
    """A view whose trailing closure holds child views.

    Attributes:
        kind: SwiftUI view type.
        children: Views of the first trailing closure.
        layout_params: Arguments inside the parentheses.
        labeled: Additional labeled trailing closures, in order.
    """

    kind: str
    children: tuple["UiExpr", ...] = ()
    layout_params: tuple[Argument, ...] = ()
    labeled: tuple[Labeled, ...] = ()


@dataclass(frozen=True)
class ModifierExpr:
    """One chained modifier.

    Attributes:
        name: SwiftUI modifier name.
        arguments: Arguments in the parentheses.
        content: Views of a trailing view-builder closure, if the modifier
            takes one (``.sheet``, ``.toolbar``).
        parameter: Closure parameter name (``route in``).
        labeled: Additional labeled trailing closures (``message:``).
    """

    name: str
    arguments: tuple[Argument, ...] = ()
    content: tuple["UiExpr", ...] | None = None
    parameter: str | None = None
    labeled: tuple[Labeled, ...] = ()


@dataclass(frozen=True)
class Modified:
    inner: "UiExpr"
    modifiers: tuple[ModifierExpr, ...]


@dataclass(frozen=True)
class Conditional:
    """``if on { then } else { otherwise }``."""

    on: BindingRef
    then: "UiExpr"
    otherwise: "UiExpr | None" = None


UiExpr = Union[Container, Leaf, Modified, Conditional]


# =============================================================================
# File-level declarations
# =============================================================================


class EdgeKind(str, Enum):
    PUSH = "push"
    SHEET = "sheet"
    COVER = "cover"
    TAB = "tab"


@dataclass(frozen=True)
class NavigationEdge:
    """One edge of the screen graph."""

    source: str | None
    target: str
    kind: EdgeKind
    node_id: str | None = None


@dataclass(frozen=True)
class StateDecl:
    """``@State private var name: Type = initial``."""

    name: str
    swift_type: str | None
    initial: ValueExpr


@dataclass(frozen=True)
class EnvironmentDecl:
    """``@Environment(\\.key) private var name``."""

    key: str
    name: str


@dataclass(frozen=True)
class ParameterDecl:
    """A screen input, declared as ``var name: Type = default``."""

    name: str
    swift_type: str
    default: ValueExpr


@dataclass(frozen=True)
class HelperFunc:
    """A generated ``private func`` stub for a custom action."""

    name: str
    parameters: tuple[tuple[str, ValueExpr], ...] = ()


@dataclass(frozen=True)
class PropertyDecl:
    """A stored property of a model.

    Attributes:
        name: Property name.
        swift_type: Swift type spelling.
        default: Default value expression.
        transient: Excluded from persistence (``@Transient``).
    """

    name: str
    swift_type: str
    default: ValueExpr
    transient: bool = False


@dataclass(frozen=True)
class ViewFile:
    name: str
    imports: tuple[str, ...]
    parameters: tuple[ParameterDecl, ...]
    environment: tuple[EnvironmentDecl, ...]
    state: tuple[StateDecl, ...]
    body: UiExpr
    helpers: tuple[HelperFunc, ...] = ()


@dataclass(frozen=True)
class ModelFile:
    """A data model; persisted models print as SwiftData classes."""

    name: str
    properties: tuple[PropertyDecl, ...]
    persisted: bool
    imports: tuple[str, ...] = ()


@dataclass(frozen=True)
class RouteCase:
    case: str
    screen_id: str
    view: str


@dataclass(frozen=True)
class EntryFile:
    """The ``@main`` app file.

    Attributes:
        app_name: App struct name.
        imports: Modules to import.
        root: Body of ``RootView``.
        routes: ``AppRoute`` cases; empty when nothing is pushed.
        models: Non-persisted model structs declared in this file.
        persisted_models: Model classes registered in the model container.
        scene_modifiers: Modifiers applied to ``RootView()`` in the scene.
    """

    app_name: str
    imports: tuple[str, ...]
    root: UiExpr
    routes: tuple[RouteCase, ...] = ()
    models: tuple[ModelFile, ...] = ()
    persisted_models: tuple[str, ...] = ()
    scene_modifiers: tuple[ModifierExpr, ...] = ()


# =============================================================================
# Swift names
# =============================================================================

_WORDS = re.compile(r"[A-Za-z0-9]+")


def _words(text: str) -> list[str]:
    words = []
    for chunk in _WORDS.findall(text):
        # Split camelCase humps but keep acronyms together.
        words.extend(re.findall(r"[A-Z]+(?![a-z])|[A-Z]?[a-z0-9]+|[0-9]+", chunk))
    return words or ["item"]


def pascal_case(text: str) -> str:
    """``"task detail"`` -> ``TaskDetail``; digits get a leading letter."""
    name = "".join(word[:1].upper() + word[1:] for word in _words(text))
    return name if name[0].isalpha() else f"V{name}"


def camel_case(text: str) -> str:
    """``"task-detail"`` -> ``taskDetail``, escaped if it is a keyword."""
    words = _words(text)
    name = words[0].lower() + "".join(w[:1].upper() + w[1:] for w in words[1:])
    if not name[0].isalpha():
        name = f"v{name}"
    return f"`{name}`" if name in SWIFT_KEYWORDS else name


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
