"""App definition layer: the declarative input to code generation.

Example usage:
    >>> from swiftship.definition import AppDefinition
    >>> app = AppDefinition.model_validate_json(path.read_text())
"""

from .lib import (
    ACTION_ADAPTER,
    Action,
    AppConfig,
    AppDefinition,
    BindingSource,
    ComponentNode,
    CustomAction,
    DataBinding,
    DataModel,
    Device,
    DismissAction,
    Modifier,
    ModelProperty,
    NavigateAction,
    PropertyType,
    Screen,
    ScreenParameter,
    SWIFT_KEYWORDS,
    ShadowIntensity,
    SheetAction,
    TabBar,
    TabSpec,
    check_identifier,
    parse_action,
    value_matches,
)

__all__ = [
    # Enums
    "BindingSource",
    "PropertyType",
    "Device",
    "ShadowIntensity",
    # Tree
    "ComponentNode",
    "DataBinding",
    "Modifier",
    # Actions
    "Action",
    "ACTION_ADAPTER",
    "NavigateAction",
    "SheetAction",
    "DismissAction",
    "CustomAction",
    "parse_action",
    "value_matches",
    # Identifiers
    "SWIFT_KEYWORDS",
    "check_identifier",
    # App
    "Screen",
    "ScreenParameter",
    "DataModel",
    "ModelProperty",
    "AppConfig",
    "TabSpec",
    "TabBar",
    "AppDefinition",
]
