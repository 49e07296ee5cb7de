"""Component catalog - authoritative registry of component types.

This module provides:
- Per-type property schemas (pydantic models) with declared defaults
- Structural constraints and bindable properties per type
- The fixed table of view modifiers

Example usage:
    >>> from swiftship.catalog import CATALOG
    >>> CATALOG.validate("vstack", {})
    {'alignment': 'center', 'spacing': '2'}
"""

from .components import CATALOG, SEED_COMPONENTS, build_default_catalog
from .lib import (
    MODIFIERS,
    VISIBILITY,
    ArgKind,
    BindableProperty,
    ComponentCatalog,
    ComponentCategory,
    ComponentConstraints,
    ComponentMeta,
    EdgeSet,
    ModifierSpec,
    Props,
    SpacingRef,
    ValueType,
)

__all__ = [
    # Registry
    "CATALOG",
    "SEED_COMPONENTS",
    "ComponentCatalog",
    "build_default_catalog",
    # Metadata
    "ComponentCategory",
    "ComponentConstraints",
    "ComponentMeta",
    "BindableProperty",
    "VISIBILITY",
    "ValueType",
    # Props
    "Props",
    "SpacingRef",
    # Modifiers
    "ArgKind",
    "EdgeSet",
    "ModifierSpec",
    "MODIFIERS",
]
