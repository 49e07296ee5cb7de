"""Component catalog and modifier table.

The catalog is the single source of truth for which component types exist,
which properties each accepts (a pydantic model per type), their structural
constraints and which properties may be bound to data. The modifier table
fixes the set of view modifiers a tree may use.

The default catalog (``CATALOG`` in ``swiftship.catalog``) is built once at
import time and frozen.
"""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, ValidationError
from pydantic_core import to_jsonable_python

from swiftship.core.errors import (
    DuplicateType,
    InvalidProps,
    UnknownModifier,
    UnknownType,
)
from swiftship.tokens import (
    ColorSlot,
    FontSizeSlot,
    FontWeight,
    MotionSlot,
    RadiusSlot,
    ShadowSlot,
    SpacingSlot,
)


class ComponentCategory(str, Enum):
    """High-level component groupings."""

    PRIMITIVES = "primitives"
    LAYOUT = "layout"
    NAVIGATION = "navigation"
    INPUT = "input"
    DATA_DISPLAY = "data-display"
    FEEDBACK = "feedback"
    PATTERNS = "patterns"


class ValueType(str, Enum):
    """Value types a bindable property carries, with their Swift spelling."""

    STRING = "string"
    INT = "int"
    DOUBLE = "double"
    BOOL = "bool"
    DATE = "date"

    @property
    def swift_type(self) -> str:
        return _SWIFT_TYPES[self]


_SWIFT_TYPES = {
    ValueType.STRING: "String",
    ValueType.INT: "Int",
    ValueType.DOUBLE: "Double",
    ValueType.BOOL: "Bool",
    ValueType.DATE: "Date",
}


# =============================================================================
# Shared prop building blocks
# =============================================================================


def _spacing_key(value: Any) -> Any:
    """Accept numeric spacing steps (``2``, ``0.5``) as scale keys."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return format(value, "g")
    return value


SpacingRef = Annotated[SpacingSlot, BeforeValidator(_spacing_key)]


class Props(BaseModel):
    """Base for per-type property schemas. Unknown keys are rejected."""

    model_config = ConfigDict(extra="forbid", use_enum_values=True)


# =============================================================================
# Metadata
# =============================================================================


@dataclass(frozen=True)
class ComponentConstraints:
    """Structural constraints for a component type."""

    can_have_children: bool = True
    max_children: int | None = None
    requires_parent: bool = False


@dataclass(frozen=True)
class BindableProperty:
    """A property that may be replaced by a data binding.

    Attributes:
        name: Property name as used in ``DataBinding.property``.
        value_type: Type of the bound value.
        two_way: Whether the control writes back (needs a ``Binding``).
    """

    name: str
    value_type: ValueType
    two_way: bool = False


# Every component may be conditionally shown through a Bool binding.
VISIBILITY = BindableProperty("is_visible", ValueType.BOOL)


@dataclass(frozen=True)
class ComponentMeta:
    """Immutable description of one component type.

    Attributes:
        type: Type tag used in ``ComponentNode.type``.
        name: Display name (the SwiftUI view it lowers to).
        category: Catalog grouping.
        description: One-line description.
        icon: SF Symbol for editor palettes.
        props_schema: Pydantic model validating the ``props`` mapping.
        constraints: Structural rules.
        bindable: Properties that accept data bindings.
        sample_props: Smallest valid props, for types with required fields.
    """

    type: str
    name: str
    category: ComponentCategory
    description: str
    icon: str
    props_schema: type[Props]
    constraints: ComponentConstraints = field(default_factory=ComponentConstraints)
    bindable: tuple[BindableProperty, ...] = ()
    sample_props: dict[str, Any] = field(default_factory=dict)

    def binding(self, name: str) -> BindableProperty | None:
        if name == VISIBILITY.name:
            return VISIBILITY
        for prop in self.bindable:
            if prop.name == name:
                return prop
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert metadata to a dictionary for export."""
        return {
            "type": self.type,
            "name": self.name,
            "category": self.category.value,
            "description": self.description,
            "icon": self.icon,
            "constraints": {
                "can_have_children": self.constraints.can_have_children,
                "max_children": self.constraints.max_children,
                "requires_parent": self.constraints.requires_parent,
            },
            "bindable": {
                prop.name: {"type": prop.value_type.value, "two_way": prop.two_way}
                for prop in self.bindable
            },
            "props_schema": self.props_schema.model_json_schema(),
        }


# =============================================================================
# Modifier table
# =============================================================================


class ArgKind(str, Enum):
    """Kinds of positional modifier arguments."""

    SPACING = "spacing"
    COLOR = "color"
    RADIUS = "radius"
    SHADOW = "shadow"
    FONT_SIZE = "font_size"
    FONT_WEIGHT = "font_weight"
    MOTION = "motion"
    NUMBER = "number"
    COUNT = "count"
    BOOL = "bool"
    STRING = "string"
    EDGES = "edges"


class EdgeSet(str, Enum):
    ALL = "all"
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    TOP = "top"
    BOTTOM = "bottom"
    LEADING = "leading"
    TRAILING = "trailing"


@dataclass(frozen=True)
class ModifierSpec:
    """One entry of the fixed modifier table.

    Attributes:
        name: Modifier name used in trees.
        swift_name: SwiftUI modifier it lowers to.
        arguments: Ordered argument kinds.
        required: How many leading arguments must be present.
    """

    name: str
    swift_name: str
    arguments: tuple[ArgKind, ...] = ()
    required: int = 0


MODIFIERS: dict[str, ModifierSpec] = {
    spec.name: spec
    for spec in (
        ModifierSpec("padding", "padding", (ArgKind.SPACING, ArgKind.EDGES)),
        ModifierSpec("background", "background", (ArgKind.COLOR,), 1),
        ModifierSpec("foreground_style", "foregroundStyle", (ArgKind.COLOR,), 1),
        ModifierSpec("tint", "tint", (ArgKind.COLOR,), 1),
        ModifierSpec("corner_radius", "clipShape", (ArgKind.RADIUS,), 1),
        ModifierSpec("shadow", "shadow", (ArgKind.SHADOW,), 1),
        ModifierSpec("frame", "frame", (ArgKind.NUMBER, ArgKind.NUMBER)),
        ModifierSpec("opacity", "opacity", (ArgKind.NUMBER,), 1),
        ModifierSpec("font", "font", (ArgKind.FONT_SIZE,), 1),
        ModifierSpec("font_weight", "fontWeight", (ArgKind.FONT_WEIGHT,), 1),
        ModifierSpec("border", "border", (ArgKind.COLOR, ArgKind.NUMBER), 1),
        ModifierSpec("line_limit", "lineLimit", (ArgKind.COUNT,), 1),
        ModifierSpec("disabled", "disabled", (ArgKind.BOOL,)),
        ModifierSpec("navigation_title", "navigationTitle", (ArgKind.STRING,), 1),
        ModifierSpec("animation", "transaction", (ArgKind.MOTION,), 1),
    )
}


def _enum_arg(enum_type: type[Enum]):
    def check(value: Any) -> str:
        if not isinstance(value, str):
            raise ValueError(f"expected a {enum_type.__name__} name, got {value!r}")
        return enum_type(value).value

    return check


def _number_arg(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"expected a number, got {value!r}")
    return value


def _count_arg(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f"expected a positive integer, got {value!r}")
    return value


def _bool_arg(value: Any) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"expected a boolean, got {value!r}")
    return value


def _string_arg(value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError(f"expected a string, got {value!r}")
    return value


def _spacing_arg(value: Any) -> str:
    return _enum_arg(SpacingSlot)(_spacing_key(value))


_ARG_CHECKS = {
    ArgKind.SPACING: _spacing_arg,
    ArgKind.COLOR: _enum_arg(ColorSlot),
    ArgKind.RADIUS: _enum_arg(RadiusSlot),
    ArgKind.SHADOW: _enum_arg(ShadowSlot),
    ArgKind.FONT_SIZE: _enum_arg(FontSizeSlot),
    ArgKind.FONT_WEIGHT: _enum_arg(FontWeight),
    ArgKind.MOTION: _enum_arg(MotionSlot),
    ArgKind.NUMBER: _number_arg,
    ArgKind.COUNT: _count_arg,
    ArgKind.BOOL: _bool_arg,
    ArgKind.STRING: _string_arg,
    ArgKind.EDGES: _enum_arg(EdgeSet),
}


# =============================================================================
# Catalog
# =============================================================================


def _field_path(loc: tuple) -> str:
    """Render a pydantic error location as ``tabs[0].title``."""
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else str(part)
    return path or "props"


class ComponentCatalog:
    """Registry of component types keyed by type tag.

    Example:
        >>> catalog = ComponentCatalog()
        >>> catalog.register(TEXT_META)
        >>> catalog.validate("text", {"content": "Hi"})["font"]
        'body'
    """

    def __init__(
        self,
        metas: Iterable[ComponentMeta] = (),
        modifiers: Mapping[str, ModifierSpec] | None = None,
    ):
        self._metas: dict[str, ComponentMeta] = {}
        self._modifiers = dict(MODIFIERS if modifiers is None else modifiers)
        self._frozen = False
        for meta in metas:
            self.register(meta)

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, meta: ComponentMeta) -> None:
        """Add a component type.

        Raises:
            DuplicateType: If the type tag is already registered.
            RuntimeError: If the catalog has been frozen.
        """
        if self._frozen:
            raise RuntimeError("Catalog is frozen; use extend() to add types")
        if meta.type in self._metas:
            raise DuplicateType(meta.type)
        self._metas[meta.type] = meta

    def freeze(self) -> "ComponentCatalog":
        self._frozen = True
        return self

    def extend(self, *metas: ComponentMeta) -> "ComponentCatalog":
        """Return a new catalog with this one's types plus ``metas``."""
        return ComponentCatalog([*self._metas.values(), *metas], self._modifiers)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def lookup(self, type_tag: str) -> ComponentMeta:
        """Get metadata for a type tag.

        Raises:
            UnknownType: If the tag is not registered.
        """
        try:
            return self._metas[type_tag]
        except KeyError:
            raise UnknownType(type_tag) from None

    def __contains__(self, type_tag: object) -> bool:
        return type_tag in self._metas

    def __iter__(self) -> Iterator[ComponentMeta]:
        return iter(self._metas.values())

    def __len__(self) -> int:
        return len(self._metas)

    def types(self) -> list[str]:
        return list(self._metas)

    def by_category(self, category: ComponentCategory | str) -> list[ComponentMeta]:
        category = ComponentCategory(category)
        return [meta for meta in self._metas.values() if meta.category == category]

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate(self, type_tag: str, raw_props: Mapping[str, Any]) -> dict[str, Any]:
        """Validate props against the type's schema and fill defaults.

        Returns:
            JSON-compatible props with every declared default present
            (optional fields without a default are omitted).

        Raises:
            UnknownType: If the tag is not registered.
            InvalidProps: On the first violation.
        """
        meta = self.lookup(type_tag)
        if not isinstance(raw_props, Mapping):
            raise InvalidProps(type_tag, "props", "must be an object")
        try:
            model = meta.props_schema.model_validate(dict(raw_props))
        except ValidationError as e:
            first = e.errors()[0]
            raise InvalidProps(type_tag, _field_path(first["loc"]), first["msg"]) from e
        return model.model_dump(mode="json", exclude_none=True)

    def defaults(self, type_tag: str) -> dict[str, Any]:
        """Declared default values of a type's optional properties."""
        meta = self.lookup(type_tag)
        values = {}
        for name, info in meta.props_schema.model_fields.items():
            if info.is_required():
                continue
            default = info.get_default(call_default_factory=True)
            if default is not None:
                values[name] = to_jsonable_python(default)
        return values

    def required_props(self, type_tag: str) -> list[str]:
        meta = self.lookup(type_tag)
        return [
            name
            for name, info in meta.props_schema.model_fields.items()
            if info.is_required()
        ]

    # ------------------------------------------------------------------
    # Modifiers
    # ------------------------------------------------------------------

    def modifier(self, name: str) -> ModifierSpec:
        """Get a modifier spec.

        Raises:
            UnknownModifier: If the name is not in the modifier table.
        """
        try:
            return self._modifiers[name]
        except KeyError:
            raise UnknownModifier(name) from None

    def modifiers(self) -> list[ModifierSpec]:
        return list(self._modifiers.values())

    def validate_modifier(
        self,
        type_tag: str,
        name: str,
        arguments: list[Any],
        field_path: str = "modifiers",
    ) -> tuple[Any, ...]:
        """Check a modifier's arguments against its declared kinds.

        Optional positions may be null. Numeric spacing steps are normalized
        to scale keys.

        Raises:
            UnknownModifier: If the name is not in the modifier table.
            InvalidProps: If the argument count or a kind is wrong.
        """
        spec = self.modifier(name)
        if not spec.required <= len(arguments) <= len(spec.arguments):
            raise InvalidProps(
                type_tag,
                f"{field_path}.arguments",
                f"'{name}' takes {spec.required} to {len(spec.arguments)} "
                f"arguments, got {len(arguments)}",
            )
        normalized = []
        for index, (kind, value) in enumerate(zip(spec.arguments, arguments)):
            if value is None and index >= spec.required:
                normalized.append(None)
                continue
            try:
                normalized.append(_ARG_CHECKS[kind](value))
            except ValueError as e:
                raise InvalidProps(
                    type_tag, f"{field_path}.arguments[{index}]", str(e)
                ) from e
        return tuple(normalized)


__all__ = [
    "ComponentCategory",
    "ValueType",
    "SpacingRef",
    "Props",
    "ComponentConstraints",
    "BindableProperty",
    "VISIBILITY",
    "ComponentMeta",
    "ArgKind",
    "EdgeSet",
    "ModifierSpec",
    "MODIFIERS",
    "ComponentCatalog",
]
