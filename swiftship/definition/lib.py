"""Declarative app definition: the input contract of the generator.

An ``AppDefinition`` is the generation unit. Screens own trees of
``ComponentNode`` objects whose ``type`` tags are resolved against the
component catalog during normalization; this module only checks shapes.

All models serialize with snake_case keys. ``Action`` is a tagged union
discriminated on ``type``.
"""

import re
from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    field_validator,
    model_validator,
)

from swiftship.tokens import ScaleRatio

_BINDING_PATH = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)*$")
_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

# Names that cannot be declared as Swift identifiers without escaping.
SWIFT_KEYWORDS = frozenset(
    {
        "associatedtype", "break", "case", "catch", "class", "continue",
        "default", "defer", "deinit", "do", "else", "enum", "extension",
        "fallthrough", "false", "fileprivate", "for", "func", "guard", "if",
        "import", "in", "init", "inout", "internal", "is", "let", "nil",
        "operator", "private", "protocol", "public", "repeat", "rethrows",
        "return", "self", "Self", "static", "struct", "subscript", "super",
        "switch", "throw", "throws", "true", "try", "typealias", "var",
        "where", "while",
    }
)  # fmt: skip


def check_identifier(value: str) -> str:
    """Validate a name that is emitted verbatim as a Swift declaration.

    Raises:
        ValueError: If the name is not an identifier or is a Swift keyword.
    """
    if not _IDENTIFIER.match(value):
        raise ValueError(f"'{value}' is not a valid identifier")
    if value in SWIFT_KEYWORDS:
        raise ValueError(f"'{value}' is a reserved Swift keyword")
    return value


# =============================================================================
# Enums
# =============================================================================


class BindingSource(str, Enum):
    """Where a bound value comes from in the generated view."""

    STATE = "state"
    ENVIRONMENT = "environment"
    PARAMETER = "parameter"


class PropertyType(str, Enum):
    """Type tags for data model properties and screen parameters."""

    STRING = "string"
    INT = "int"
    DOUBLE = "double"
    BOOL = "bool"
    DATE = "date"
    ARRAY = "array"
    OPTIONAL = "optional"


class Device(str, Enum):
    IPHONE = "iphone"
    IPAD = "ipad"


class ShadowIntensity(str, Enum):
    SUBTLE = "subtle"
    NORMAL = "normal"
    STRONG = "strong"


# =============================================================================
# Component tree
# =============================================================================


class DataBinding(BaseModel):
    """Connects a component property to a data source.

    Attributes:
        property: Name of the bound property on the component.
        source: Source kind (state, environment, parameter).
        path: Dot-separated identifier path into the source.
    """

    @property
    def root(self) -> str:
        """First segment of the path."""
        return self.path.split(".", 1)[0]

    @property
    def segments(self) -> list[str]:
        return self.path.split(".")

    def is_well_formed(self) -> bool:
        return bool(_BINDING_PATH.match(self.path))

    def reserved_segments(self) -> list[str]:
        """Path segments that are Swift keywords."""
        return [segment for segment in self.segments if segment in SWIFT_KEYWORDS]

    # From here on ``property`` names the field, not the builtin.
    property: str = Field(..., min_length=1)
    source: BindingSource
    path: str

    model_config = ConfigDict(frozen=True, use_enum_values=True)


class Modifier(BaseModel):
    """An order-sensitive view modifier applied to a component."""

    name: str
    arguments: list[Any] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class ComponentNode(BaseModel):
    """Recursive node of a declarative UI tree.

    A node exclusively owns its children. Property keys and their value
    shapes depend on ``type`` and are validated by the catalog.
    """

    id: str = Field(..., min_length=1, description="Unique identifier within a tree")
    type: str = Field(..., description="Component type tag registered in the catalog")
    props: dict[str, Any] = Field(default_factory=dict)
    children: list["ComponentNode"] = Field(default_factory=list)
    bindings: list[DataBinding] = Field(default_factory=list)
    modifiers: list[Modifier] = Field(default_factory=list)

    def iter_nodes(self):
        """Yield this node and its descendants in pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))


# =============================================================================
# Actions
# =============================================================================


class NavigateAction(BaseModel):
    """Push the destination screen onto the navigation stack."""

    type: Literal["navigate"] = "navigate"
    destination: str


class SheetAction(BaseModel):
    """Present the destination screen as a modal sheet."""

    type: Literal["sheet"] = "sheet"
    destination: str = Field(
        ..., validation_alias=AliasChoices("destination", "content")
    )


class DismissAction(BaseModel):
    type: Literal["dismiss"] = "dismiss"


class CustomAction(BaseModel):
    """Call a named handler generated as an empty helper method."""

    type: Literal["custom"] = "custom"
    name: str
    parameters: dict[str, Any] = Field(default_factory=dict)

    @field_validator("name")
    @classmethod
    def _identifier(cls, value: str) -> str:
        return check_identifier(value)


Action = Annotated[
    NavigateAction | SheetAction | DismissAction | CustomAction,
    Field(discriminator="type"),
]

ACTION_ADAPTER: TypeAdapter[Action] = TypeAdapter(Action)


def parse_action(raw: Any) -> NavigateAction | SheetAction | DismissAction | CustomAction:
    """Validate a raw mapping into one of the action variants."""
    return ACTION_ADAPTER.validate_python(raw)


# =============================================================================
# Screens and models
# =============================================================================


def value_matches(value: Any, kind: str, element_type: str | None = None) -> bool:
    """Whether a JSON default fits a property type tag.

    Dates are given as seconds since 1970. ``None`` always fits.
    """
    if value is None:
        return True
    element = element_type or PropertyType.STRING.value
    match PropertyType(kind):
        case PropertyType.STRING:
            return isinstance(value, str)
        case PropertyType.BOOL:
            return isinstance(value, bool)
        case PropertyType.INT:
            return isinstance(value, int) and not isinstance(value, bool)
        case PropertyType.DOUBLE | PropertyType.DATE:
            return isinstance(value, (int, float)) and not isinstance(value, bool)
        case PropertyType.ARRAY:
            return isinstance(value, list) and all(
                item is not None and value_matches(item, element) for item in value
            )
        case PropertyType.OPTIONAL:
            return value_matches(value, element)


class ScreenParameter(BaseModel):
    """A value passed into a screen when it is presented."""

    name: str
    type: PropertyType = PropertyType.STRING
    element_type: PropertyType | None = None
    default: Any = None

    model_config = ConfigDict(use_enum_values=True)

    @field_validator("name")
    @classmethod
    def _identifier(cls, value: str) -> str:
        return check_identifier(value)

    @model_validator(mode="after")
    def _default_fits_type(self) -> "ScreenParameter":
        if not value_matches(self.default, self.type, self.element_type):
            raise ValueError(f"default {self.default!r} is not a valid {self.type}")
        return self


class Screen(BaseModel):
    """One screen of the app.

    Attributes:
        id: Screen id referenced by navigation actions and tabs.
        name: Display name; also the base of the generated view type.
        path: Optional deep link path.
        parameters: Values the screen receives from its presenter.
        content: Root of the screen's component tree.
    """

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    path: str | None = None
    parameters: list[ScreenParameter] = Field(default_factory=list)
    content: ComponentNode


class ModelProperty(BaseModel):
    """One stored property of a data model."""

    name: str
    type: PropertyType
    element_type: PropertyType | None = None
    is_optional: bool = False
    default_value: Any = None
    is_persisted: bool = True

    model_config = ConfigDict(use_enum_values=True)

    @field_validator("name")
    @classmethod
    def _identifier(cls, value: str) -> str:
        return check_identifier(value)

    @model_validator(mode="after")
    def _default_fits_type(self) -> "ModelProperty":
        if not value_matches(self.default_value, self.type, self.element_type):
            raise ValueError(
                f"default_value {self.default_value!r} is not a valid {self.type}"
            )
        return self


class DataModel(BaseModel):
    """A data model, emitted as a SwiftData class when persisted."""

    name: str
    properties: list[ModelProperty] = Field(default_factory=list)
    is_persisted: bool = False

    @field_validator("name")
    @classmethod
    def _identifier(cls, value: str) -> str:
        return check_identifier(value)

    @property
    def instance_name(self) -> str:
        """Lower camel case name used for state instances (``TodoItem`` -> ``todoItem``)."""
        return self.name[0].lower() + self.name[1:]


# =============================================================================
# App
# =============================================================================


class AppConfig(BaseModel):
    """Identity, platform and appearance settings of the app."""

    # Identity
    name: str = Field(..., min_length=1)
    bundle_id: str
    display_name: str
    version: str = "1.0.0"
    build_number: str = "1"

    # Platform
    min_ios_version: str = "17.0"
    supported_devices: list[Device] = Field(default_factory=lambda: [Device.IPHONE])

    # Appearance
    accent_color: str = "#007AFF"
    supports_light_mode: bool = True
    supports_dark_mode: bool = True
    prefers_dark: bool = False
    base_unit: Annotated[float, Field(gt=0)] = 4
    base_font_size: Annotated[float, Field(gt=0)] = 17
    scale_ratio: ScaleRatio = ScaleRatio.MAJOR_SECOND
    shadow_intensity: ShadowIntensity = ShadowIntensity.NORMAL

    # Features
    uses_swift_data: bool = False
    uses_cloud_kit: bool = False

    model_config = ConfigDict(use_enum_values=True)


class TabSpec(BaseModel):
    """One tab of the root tab bar."""

    screen: str
    title: str
    icon: str = Field(..., description="SF Symbol name")
    badge: int | None = None


class TabBar(BaseModel):
    tabs: list[TabSpec] = Field(..., min_length=1)


class AppDefinition(BaseModel):
    """The complete generation unit.

    The entry screen and every navigation or tab target must reference an
    existing screen. That is checked by the orchestrator, which aggregates
    every dangling reference into one error.
    """

    config: AppConfig
    screens: list[Screen] = Field(..., min_length=1)
    models: list[DataModel] = Field(default_factory=list)
    entry_screen: str
    tab_bar: TabBar | None = None

    def screen_ids(self) -> set[str]:
        return {screen.id for screen in self.screens}

    def get_screen(self, screen_id: str) -> Screen | None:
        for screen in self.screens:
            if screen.id == screen_id:
                return screen
        return None

    def get_model(self, name: str) -> DataModel | None:
        for model in self.models:
            if model.name == name:
                return model
        return None


__all__ = [
    "SWIFT_KEYWORDS",
    "check_identifier",
    "BindingSource",
    "PropertyType",
    "Device",
    "ShadowIntensity",
    "DataBinding",
    "Modifier",
    "ComponentNode",
    "NavigateAction",
    "SheetAction",
    "DismissAction",
    "CustomAction",
    "Action",
    "ACTION_ADAPTER",
    "parse_action",
    "value_matches",
    "ScreenParameter",
    "Screen",
    "ModelProperty",
    "DataModel",
    "AppConfig",
    "TabSpec",
    "TabBar",
    "AppDefinition",
]
