"""Codegen orchestrator: AppDefinition to Swift source files.

Example:
    >>> from swiftship.codegen import generate
    >>> result = generate(app_json)
    >>> result.paths
    ['Views/HomeView.swift', 'TodoApp.swift']
"""

from swiftship.codegen.lib import (
    CodegenResult,
    GeneratedFile,
    assign_symbols,
    check_references,
    collect_warnings,
    generate,
    load_app,
    push_targets,
)

__all__ = [
    "generate",
    "load_app",
    "CodegenResult",
    "GeneratedFile",
    "assign_symbols",
    "push_targets",
    "check_references",
    "collect_warnings",
]
