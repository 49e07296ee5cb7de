"""swiftship: deterministic SwiftUI code generation from declarative UI trees."""

from swiftship.codegen import CodegenResult, GeneratedFile, generate
from swiftship.definition import AppDefinition, ComponentNode, Screen
from swiftship.tokens import DesignTokens, generate_design_tokens

__all__ = [
    # Orchestration
    "generate",
    "CodegenResult",
    "GeneratedFile",
    # Input model
    "AppDefinition",
    "ComponentNode",
    "Screen",
    # Tokens
    "DesignTokens",
    "generate_design_tokens",
]
