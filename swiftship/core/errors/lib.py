"""Exception hierarchy shared by every stage of the generator."""

from dataclasses import asdict, dataclass
from typing import Any


class CodegenError(Exception):
    """Base class for all generator errors.

    Attributes:
        family: Error family (schema, reference, invariant, resource).
        node_id: Offending node, when one is known.
        path: Location from the tree root, e.g. ``root.children[2]``.
        screen_id: Screen whose tree raised the error, once known.
    """

    family = "codegen"

    def __init__(
        self,
        message: str,
        node_id: str | None = None,
        path: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.node_id = node_id
        self.path = path
        self.screen_id: str | None = None

    def __str__(self) -> str:
        text = self.message
        if self.path:
            text = f"{text} (at {self.path})"
        if self.screen_id:
            text = f"screen '{self.screen_id}': {text}"
        return text

    def in_screen(self, screen_id: str) -> "CodegenError":
        """Tag the error with the screen it was raised for."""
        self.screen_id = screen_id
        return self

    def to_dict(self) -> dict[str, Any]:
        """Serialize for the calling layer (e.g. as corrective AI context)."""
        return {
            "error": type(self).__name__,
            "family": self.family,
            "message": self.message,
            "node_id": self.node_id,
            "path": self.path,
            "screen_id": self.screen_id,
        }


# =============================================================================
# Schema errors
# =============================================================================


class SchemaError(CodegenError):
    """The input tree does not satisfy the component catalog."""

    family = "schema"


class UnknownType(SchemaError):
    """A node's type tag is not registered in the catalog."""

    def __init__(
        self, type_tag: str, node_id: str | None = None, path: str | None = None
    ):
        super().__init__(f"Unknown component type '{type_tag}'", node_id, path)
        self.type_tag = type_tag


class DuplicateType(SchemaError):
    """A component type was registered twice."""

    def __init__(self, type_tag: str):
        super().__init__(f"Component type '{type_tag}' is already registered")
        self.type_tag = type_tag


class InvalidProps(SchemaError):
    """A property failed its type's schema.

    Attributes:
        type_tag: Component type being validated.
        field_path: Property path inside ``props`` (e.g. ``tabs[0].title``).
        reason: Human-readable reason.
    """

    def __init__(
        self,
        type_tag: str,
        field_path: str,
        reason: str,
        node_id: str | None = None,
        path: str | None = None,
    ):
        super().__init__(
            f"Invalid props for '{type_tag}': {field_path}: {reason}", node_id, path
        )
        self.type_tag = type_tag
        self.field_path = field_path
        self.reason = reason

    def locate(self, node_id: str, path: str) -> "InvalidProps":
        """Return a copy of this error bound to a tree location."""
        return InvalidProps(self.type_tag, self.field_path, self.reason, node_id, path)

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update(
            type=self.type_tag, field_path=self.field_path, reason=self.reason
        )
        return data


class DuplicateId(SchemaError):
    """A node id appears more than once in one tree."""

    def __init__(self, node_id: str, path: str, first_path: str):
        super().__init__(
            f"Duplicate node id '{node_id}' (first seen at {first_path})",
            node_id,
            path,
        )
        self.first_path = first_path


class InvalidStructure(SchemaError):
    """Tree shape violates a type's structural constraints."""


# =============================================================================
# Reference errors
# =============================================================================


@dataclass(frozen=True)
class ReferenceIssue:
    """One dangling or unresolvable reference.

    Attributes:
        kind: What refers (entry_screen, tab, navigation, binding).
        reference: The unresolved value (screen id or binding path).
        message: Human-readable explanation.
        screen_id: Screen containing the reference, if any.
        node_id: Node containing the reference, if any.
    """

    kind: str
    reference: str
    message: str
    screen_id: str | None = None
    node_id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class CrossReferenceError(CodegenError):
    """Aggregated reference failures across a whole app definition."""

    family = "reference"

    def __init__(self, issues: list[ReferenceIssue]):
        lines = [f"{len(issues)} unresolved reference(s):"]
        lines.extend(f"  - {issue.message}" for issue in issues)
        super().__init__("\n".join(lines))
        self.issues = list(issues)

    @property
    def references(self) -> list[str]:
        """The dangling values, in discovery order."""
        return [issue.reference for issue in self.issues]

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["issues"] = [issue.to_dict() for issue in self.issues]
        return data


class UnresolvedBindingSource(CodegenError):
    """A binding path does not resolve under its source kind."""

    family = "reference"

    def __init__(
        self,
        source: str,
        binding_path: str,
        reason: str,
        node_id: str | None = None,
        path: str | None = None,
    ):
        super().__init__(
            f"Cannot resolve {source} binding '{binding_path}': {reason}",
            node_id,
            path,
        )
        self.source = source
        self.binding_path = binding_path
        self.reason = reason


# =============================================================================
# Invariant violations
# =============================================================================


class InvariantError(CodegenError):
    """Catalog and builder/printer disagree. Never expected for valid trees."""

    family = "invariant"


class UnknownModifier(InvariantError):
    """Modifier name is absent from the fixed modifier table."""

    def __init__(self, name: str, node_id: str | None = None, path: str | None = None):
        super().__init__(f"Unknown modifier '{name}'", node_id, path)
        self.name = name


class TokenResolutionFailure(InvariantError):
    """A design-token reference names a slot outside its declared enum."""

    def __init__(
        self,
        category: str,
        slot: Any,
        node_id: str | None = None,
        path: str | None = None,
    ):
        super().__init__(f"Unknown {category} token '{slot}'", node_id, path)
        self.category = category
        self.slot = slot


class UnrenderableExpression(InvariantError):
    """The printer was handed an IR shape it has no rule for."""


# =============================================================================
# Resource limits
# =============================================================================


class ResourceLimitExceeded(CodegenError):
    """Tree depth or node count exceeds the configured ceiling."""

    family = "resource"

    def __init__(self, limit: str, value: int, maximum: int, path: str | None = None):
        super().__init__(f"Tree {limit} {value} exceeds maximum of {maximum}", path=path)
        self.limit = limit
        self.value = value
        self.maximum = maximum


__all__ = [
    "CodegenError",
    "SchemaError",
    "UnknownType",
    "DuplicateType",
    "InvalidProps",
    "DuplicateId",
    "InvalidStructure",
    "ReferenceIssue",
    "CrossReferenceError",
    "UnresolvedBindingSource",
    "InvariantError",
    "UnknownModifier",
    "TokenResolutionFailure",
    "UnrenderableExpression",
    "ResourceLimitExceeded",
]
