"""AST builder: normalized trees to SwiftUI IR.

Example:
    >>> from swiftship.builder import build
    >>> from swiftship.normalizer import normalize
    >>> result = build(normalize({"id": "root", "type": "text"}), tokens)
    >>> result.body
    Leaf(kind='Text', value=StringLit(value='Text'), ...)
"""

from swiftship.builder.lib import (
    COMPONENT_RULES,
    ENVIRONMENT_KEYS,
    MODIFIER_RULES,
    BindingAnalysis,
    BindingContext,
    BuildResult,
    ScreenSymbol,
    analyze_bindings,
    build,
    build_entry,
    build_model,
    check_bindings,
    component_rule,
    json_literal,
    modifier_rule,
    route_destination,
    swift_type,
    tab_item,
    typed_literal,
    zero_value,
)

__all__ = [
    # Entry points
    "build",
    "build_entry",
    "build_model",
    "analyze_bindings",
    "check_bindings",
    # Context
    "BindingContext",
    "BindingAnalysis",
    "BuildResult",
    "ScreenSymbol",
    "ENVIRONMENT_KEYS",
    # Rules
    "COMPONENT_RULES",
    "MODIFIER_RULES",
    "component_rule",
    "modifier_rule",
    "route_destination",
    "tab_item",
    # Swift values
    "swift_type",
    "zero_value",
    "typed_literal",
    "json_literal",
]
