"""Tree normalization and structural validation.

``normalize`` walks a raw component tree depth-first, validates every node
against the catalog, fills property defaults and rejects malformed trees
with the node id and a path from the root. Screen references found along
the way are returned for the orchestrator, which checks them against the
whole app.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import ValidationError

from swiftship.catalog import CATALOG, ComponentCatalog, ComponentMeta
from swiftship.config import GeneratorSettings
from swiftship.core.errors import (
    DuplicateId,
    InvalidProps,
    InvalidStructure,
    ResourceLimitExceeded,
    UnknownModifier,
    UnknownType,
)
from swiftship.definition import ComponentNode, DataBinding, Modifier

ROOT_PATH = "root"


@dataclass(frozen=True)
class TreeLimits:
    """Ceilings checked before a tree is traversed.

    Attributes:
        max_depth: Maximum number of nesting levels (the root is level 1).
        max_nodes: Maximum number of nodes.
    """

    max_depth: int = 32
    max_nodes: int = 2000

    @classmethod
    def from_settings(cls, settings: GeneratorSettings) -> "TreeLimits":
        return cls(settings.max_tree_depth, settings.max_node_count)


class ReferenceKind(str, Enum):
    """How a node refers to another screen."""

    PUSH = "push"
    SHEET = "sheet"
    COVER = "cover"
    TAB = "tab"


@dataclass(frozen=True)
class ScreenReference:
    """A screen id referenced from inside a tree.

    Attributes:
        node_id: Node carrying the reference.
        property: Property path inside the node's props (``action.destination``).
        target: Referenced screen id.
        kind: Presentation style of the reference.
        path: Location of the node from the root.
    """

    node_id: str
    property: str
    target: str
    kind: ReferenceKind
    path: str


@dataclass(frozen=True)
class NormalizedNode:
    """A validated node with every declared default filled in.

    Modifier arguments are normalized (numeric spacing steps become scale
    keys).
    """

    id: str
    type: str
    props: dict[str, Any]
    children: tuple["NormalizedNode", ...]
    bindings: tuple[DataBinding, ...]
    modifiers: tuple[Modifier, ...]
    path: str
    depth: int
    meta: ComponentMeta = field(repr=False, compare=False)

    def binding_for(self, prop: str) -> DataBinding | None:
        for binding in self.bindings:
            if binding.property == prop:
                return binding
        return None

    def iter_nodes(self) -> Iterator["NormalizedNode"]:
        """Yield this node and its descendants in pre-order."""
        yield self
        for child in self.children:
            yield from child.iter_nodes()

    def to_node(self) -> ComponentNode:
        """Convert back to a plain ``ComponentNode`` (with defaults filled)."""
        return ComponentNode(
            id=self.id,
            type=self.type,
            props=self.props,
            children=[child.to_node() for child in self.children],
            bindings=list(self.bindings),
            modifiers=list(self.modifiers),
        )


@dataclass(frozen=True)
class NormalizedTree:
    """Output of ``normalize``.

    Attributes:
        root: Normalized root node.
        references: Screen references in pre-order.
        node_count: Number of nodes in the tree.
        max_depth: Number of nesting levels.
    """

    root: NormalizedNode
    references: tuple[ScreenReference, ...]
    node_count: int
    max_depth: int

    def iter_nodes(self) -> Iterator[NormalizedNode]:
        return self.root.iter_nodes()

    def get(self, node_id: str) -> NormalizedNode | None:
        for node in self.iter_nodes():
            if node.id == node_id:
                return node
        return None


# =============================================================================
# Raw input
# =============================================================================


def _location(loc: tuple) -> str:
    path = ROOT_PATH
    for part in loc:
        path += f"[{part}]" if isinstance(part, int) else f".{part}"
    return path


def _coerce(root: ComponentNode | Mapping[str, Any]) -> ComponentNode:
    """Parse a raw mapping into a ``ComponentNode``.

    Raises:
        InvalidStructure: If the mapping does not have the node shape.
    """
    if isinstance(root, ComponentNode):
        return root
    try:
        return ComponentNode.model_validate(root)
    except ValidationError as e:
        first = e.errors()[0]
        raise InvalidStructure(
            f"Malformed node: {first['msg']}", path=_location(first["loc"])
        ) from e


# =============================================================================
# Resource limits
# =============================================================================


def measure(root: ComponentNode, limits: TreeLimits) -> tuple[int, int]:
    """Count nodes and nesting levels, failing fast on ceilings and cycles.

    Returns:
        ``(node_count, max_depth)``.

    Raises:
        ResourceLimitExceeded: If a ceiling is crossed.
        InvalidStructure: If a node is its own ancestor.
    """
    count = 0
    deepest = 0
    stack: list[tuple[ComponentNode, int, str, frozenset[int]]] = [
        (root, 1, ROOT_PATH, frozenset())
    ]
    while stack:
        node, depth, path, ancestors = stack.pop()
        if id(node) in ancestors:
            raise InvalidStructure(
                f"Cycle detected: node '{node.id}' is its own ancestor",
                node.id,
                path,
            )
        count += 1
        if count > limits.max_nodes:
            raise ResourceLimitExceeded("node count", count, limits.max_nodes, path)
        if depth > limits.max_depth:
            raise ResourceLimitExceeded("depth", depth, limits.max_depth, path)
        deepest = max(deepest, depth)
        inner = ancestors | {id(node)}
        for index in reversed(range(len(node.children))):
            stack.append(
                (node.children[index], depth + 1, f"{path}.children[{index}]", inner)
            )
    return count, deepest


# =============================================================================
# Reference collection
# =============================================================================

_ACTION_KINDS = {"navigate": ReferenceKind.PUSH, "sheet": ReferenceKind.SHEET}

# Component types whose ``destination`` prop names a screen.
_DESTINATION_KINDS = {
    "navigationlink": ReferenceKind.PUSH,
    "sheet": ReferenceKind.SHEET,
    "fullscreencover": ReferenceKind.COVER,
}


def _action_targets(
    value: Any, field_path: str
) -> Iterator[tuple[str, str, ReferenceKind]]:
    """Find navigate/sheet actions anywhere inside a props value."""
    if isinstance(value, Mapping):
        kind = _ACTION_KINDS.get(value.get("type"))
        if kind is not None and isinstance(value.get("destination"), str):
            yield f"{field_path}.destination", value["destination"], kind
            return
        for key, item in value.items():
            key_path = f"{field_path}.{key}" if field_path else key
            yield from _action_targets(item, key_path)
    elif isinstance(value, list):
        for index, item in enumerate(value):
            yield from _action_targets(item, f"{field_path}[{index}]")


def _references(
    node_id: str, type_tag: str, props: dict[str, Any], path: str
) -> list[ScreenReference]:
    found = []
    kind = _DESTINATION_KINDS.get(type_tag)
    if kind is not None and props.get("destination"):
        found.append(
            ScreenReference(node_id, "destination", props["destination"], kind, path)
        )
    if type_tag == "tabview":
        for index, tab in enumerate(props.get("tabs", [])):
            found.append(
                ScreenReference(
                    node_id,
                    f"tabs[{index}].screen",
                    tab["screen"],
                    ReferenceKind.TAB,
                    path,
                )
            )
    for prop, target, kind in _action_targets(props, ""):
        found.append(ScreenReference(node_id, prop, target, kind, path))
    return found


# =============================================================================
# Normalization
# =============================================================================


class _Walker:
    """Pre-order validator for one tree. Raises on the first error."""

    def __init__(self, catalog: ComponentCatalog):
        self.catalog = catalog
        self.seen: dict[str, str] = {}
        self.references: list[ScreenReference] = []

    def visit(self, node: ComponentNode, path: str, depth: int) -> NormalizedNode:
        meta = self._lookup(node, path)
        try:
            props = self.catalog.validate(node.type, node.props)
        except InvalidProps as e:
            raise e.locate(node.id, path) from e

        self._check_structure(node, meta, props, path, depth)
        if node.id in self.seen:
            raise DuplicateId(node.id, path, self.seen[node.id])
        self.seen[node.id] = path

        bindings = self._check_bindings(node, meta, path)
        modifiers = self._check_modifiers(node, path)
        self.references.extend(_references(node.id, node.type, props, path))

        children = tuple(
            self.visit(child, f"{path}.children[{index}]", depth + 1)
            for index, child in enumerate(node.children)
        )
        return NormalizedNode(
            id=node.id,
            type=node.type,
            props=props,
            children=children,
            bindings=bindings,
            modifiers=modifiers,
            path=path,
            depth=depth,
            meta=meta,
        )

    def _lookup(self, node: ComponentNode, path: str) -> ComponentMeta:
        try:
            return self.catalog.lookup(node.type)
        except UnknownType as e:
            raise UnknownType(node.type, node.id, path) from e

    def _check_structure(
        self,
        node: ComponentNode,
        meta: ComponentMeta,
        props: dict[str, Any],
        path: str,
        depth: int,
    ) -> None:
        constraints = meta.constraints
        if node.children and not constraints.can_have_children:
            raise InvalidStructure(
                f"'{node.type}' cannot have children", node.id, path
            )
        if (
            constraints.max_children is not None
            and len(node.children) > constraints.max_children
        ):
            raise InvalidStructure(
                f"'{node.type}' allows at most {constraints.max_children} children, "
                f"got {len(node.children)}",
                node.id,
                path,
            )
        if constraints.requires_parent and depth == 1:
            raise InvalidStructure(
                f"'{node.type}' must be placed inside a parent component",
                node.id,
                path,
            )
        if node.type == "toolbar" and node.modifiers:
            raise InvalidStructure(
                "'toolbar' does not accept modifiers", node.id, path
            )
        if node.type in ("sheet", "fullscreencover") and props.get("destination"):
            if node.children:
                raise InvalidStructure(
                    f"'{node.type}' with a destination cannot have inline content",
                    node.id,
                    path,
                )

    def _check_bindings(
        self, node: ComponentNode, meta: ComponentMeta, path: str
    ) -> tuple[DataBinding, ...]:
        bound: set[str] = set()
        for index, binding in enumerate(node.bindings):
            where = f"bindings[{index}]"
            if meta.binding(binding.property) is None:
                raise InvalidProps(
                    node.type,
                    f"{where}.property",
                    f"'{binding.property}' is not a bindable property",
                    node.id,
                    path,
                )
            if binding.property in bound:
                raise InvalidProps(
                    node.type,
                    f"{where}.property",
                    f"'{binding.property}' is bound more than once",
                    node.id,
                    path,
                )
            if not binding.path:
                raise InvalidProps(
                    node.type, f"{where}.path", "must not be empty", node.id, path
                )
            if not binding.is_well_formed():
                raise InvalidProps(
                    node.type,
                    f"{where}.path",
                    f"'{binding.path}' is not a dot-separated identifier path",
                    node.id,
                    path,
                )
            reserved = binding.reserved_segments()
            if reserved:
                raise InvalidProps(
                    node.type,
                    f"{where}.path",
                    f"'{reserved[0]}' is a reserved Swift keyword",
                    node.id,
                    path,
                )
            bound.add(binding.property)
        return tuple(node.bindings)

    def _check_modifiers(
        self, node: ComponentNode, path: str
    ) -> tuple[Modifier, ...]:
        modifiers = []
        for index, modifier in enumerate(node.modifiers):
            try:
                arguments = self.catalog.validate_modifier(
                    node.type,
                    modifier.name,
                    modifier.arguments,
                    field_path=f"modifiers[{index}]",
                )
            except UnknownModifier as e:
                raise UnknownModifier(e.name, node.id, path) from e
            except InvalidProps as e:
                raise e.locate(node.id, path) from e
            modifiers.append(Modifier(name=modifier.name, arguments=list(arguments)))
        return tuple(modifiers)


def normalize(
    root: ComponentNode | Mapping[str, Any],
    catalog: ComponentCatalog = CATALOG,
    limits: TreeLimits | None = None,
) -> NormalizedTree:
    """Validate a component tree and fill property defaults.

    Resource limits and cycles are checked before any node is validated.
    The first error in pre-order is raised.

    Args:
        root: Tree root, as a ``ComponentNode`` or a raw mapping.
        catalog: Catalog to validate against.
        limits: Depth and node-count ceilings.

    Returns:
        NormalizedTree: Validated tree, screen references and stats.

    Raises:
        ResourceLimitExceeded: Tree is too deep or too large.
        InvalidStructure: Malformed node, cycle or constraint violation.
        UnknownType: A type tag is not registered.
        InvalidProps: Props, binding or modifier arguments are invalid.
        DuplicateId: A node id repeats.
        UnknownModifier: A modifier is not in the modifier table.

    Example:
        >>> tree = normalize({"id": "root", "type": "vstack"})
        >>> tree.root.props["spacing"]
        '2'
    """
    node = _coerce(root)
    node_count, max_depth = measure(node, limits or TreeLimits())
    walker = _Walker(catalog)
    normalized = walker.visit(node, ROOT_PATH, 1)
    return NormalizedTree(
        root=normalized,
        references=tuple(walker.references),
        node_count=node_count,
        max_depth=max_depth,
    )


__all__ = [
    "ROOT_PATH",
    "TreeLimits",
    "ReferenceKind",
    "ScreenReference",
    "NormalizedNode",
    "NormalizedTree",
    "measure",
    "normalize",
]
