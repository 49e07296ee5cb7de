"""Codegen orchestrator: one AppDefinition in, a set of Swift files out.

Pipeline per request:
    1. Normalize every screen tree (schema errors raise, tagged with the screen)
    2. Validate cross references and bindings across the whole app, raising
       one aggregated ``CrossReferenceError``
    3. Resolve design tokens once
    4. Build and print each screen, in parallel when configured
    5. Collect warnings and emit view, model and entry files

The orchestrator never touches the filesystem; writing files is the
caller's job.
"""

import logging
from collections.abc import Mapping
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from swiftship.builder import (
    BindingContext,
    BuildResult,
    ScreenSymbol,
    build,
    build_entry,
    build_model,
    check_bindings,
)
from swiftship.catalog import CATALOG, ComponentCatalog
from swiftship.config import GeneratorSettings
from swiftship.core.errors import (
    CodegenError,
    CrossReferenceError,
    InvalidStructure,
    ReferenceIssue,
)
from swiftship.definition import AppDefinition, Screen
from swiftship.ir import EdgeKind, NavigationEdge, ViewFile
from swiftship.normalizer import (
    NormalizedNode,
    NormalizedTree,
    ReferenceKind,
    TreeLimits,
    normalize,
)
from swiftship.printer import print_entry_file, print_model_file, print_view_file
from swiftship.tokens import DesignTokens, tokens_from_config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratedFile:
    """One output file.

    Attributes:
        path: Path relative to the project root (``Views/HomeView.swift``).
        content: Full Swift source.
    """

    path: str
    content: str


@dataclass(frozen=True)
class CodegenResult:
    """Everything one generation request produced.

    Attributes:
        files: Screen views in screen order, then persisted models, then
            the entry file.
        warnings: Non-fatal findings in discovery order.
        tokens: Token set every file was styled with.
        navigation: Every navigation edge, in screen order.
    """

    files: tuple[GeneratedFile, ...]
    warnings: tuple[str, ...]
    tokens: DesignTokens
    navigation: tuple[NavigationEdge, ...] = ()

    @property
    def paths(self) -> list[str]:
        return [file.path for file in self.files]

    def get(self, path: str) -> GeneratedFile | None:
        for file in self.files:
            if file.path == path:
                return file
        return None


# =============================================================================
# Input
# =============================================================================


def load_app(raw: AppDefinition | Mapping[str, Any]) -> AppDefinition:
    """Validate raw input, reporting the first failure with its location."""
    if isinstance(raw, AppDefinition):
        return raw
    try:
        return AppDefinition.model_validate(raw)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"]) or "app"
        raise InvalidStructure(
            f"Invalid app definition: {location}: {first['msg']}", path=location
        ) from e


def _normalize_screens(
    app: AppDefinition, catalog: ComponentCatalog, limits: TreeLimits
) -> dict[str, NormalizedTree]:
    trees: dict[str, NormalizedTree] = {}
    for screen in app.screens:
        if screen.id in trees:
            continue
        try:
            trees[screen.id] = normalize(screen.content, catalog, limits)
        except CodegenError as e:
            raise e.in_screen(screen.id) from None
        logger.debug(
            "Normalized screen '%s': %d nodes, depth %d",
            screen.id,
            trees[screen.id].node_count,
            trees[screen.id].max_depth,
        )
    return trees


def _unique(name: str, taken: set[str]) -> str:
    candidate, suffix = name, 2
    while candidate in taken:
        candidate, suffix = f"{name}{suffix}", suffix + 1
    taken.add(candidate)
    return candidate


def assign_symbols(
    app: AppDefinition, trees: Mapping[str, NormalizedTree]
) -> dict[str, ScreenSymbol]:
    """Unique view struct names and route cases per screen."""
    views: set[str] = {"RootView", "RouteDestination"}
    routes: set[str] = set()
    symbols: dict[str, ScreenSymbol] = {}
    for screen in app.screens:
        if screen.id in symbols:
            continue
        derived = ScreenSymbol.derive(screen.id, screen.name)
        symbols[screen.id] = ScreenSymbol(
            screen.id,
            _unique(derived.view, views),
            _unique(derived.route, routes),
            owns_stack=trees[screen.id].root.type == "navigationstack",
        )
    return symbols


def push_targets(app: AppDefinition, trees: Mapping[str, NormalizedTree]) -> tuple[str, ...]:
    """Existing screens reached by push navigation, in first-reference order."""
    ids = app.screen_ids()
    targets: dict[str, None] = {}
    for tree in trees.values():
        for ref in tree.references:
            if ref.kind == ReferenceKind.PUSH and ref.target in ids:
                targets.setdefault(ref.target)
    return tuple(targets)


# =============================================================================
# Cross references
# =============================================================================


def check_references(
    app: AppDefinition,
    trees: Mapping[str, NormalizedTree],
    symbols: Mapping[str, ScreenSymbol] | None = None,
    routes: frozenset[str] | None = None,
) -> list[ReferenceIssue]:
    """Every dangling screen id and unresolvable binding in the app."""
    ids = app.screen_ids()
    issues: list[ReferenceIssue] = []

    seen: set[str] = set()
    for screen in app.screens:
        if screen.id in seen:
            issues.append(
                ReferenceIssue(
                    "screen", screen.id, f"Screen id '{screen.id}' is declared twice"
                )
            )
        seen.add(screen.id)

    if app.entry_screen not in ids:
        issues.append(
            ReferenceIssue(
                "entry_screen",
                app.entry_screen,
                f"Entry screen '{app.entry_screen}' does not exist",
            )
        )
    if app.tab_bar is not None:
        for index, tab in enumerate(app.tab_bar.tabs):
            if tab.screen not in ids:
                issues.append(
                    ReferenceIssue(
                        "tab",
                        tab.screen,
                        f"Tab {index} ('{tab.title}') targets missing screen '{tab.screen}'",
                    )
                )

    for screen_id, tree in trees.items():
        for ref in tree.references:
            if ref.target not in ids:
                issues.append(
                    ReferenceIssue(
                        ref.kind.value,
                        ref.target,
                        f"Screen '{screen_id}', node '{ref.node_id}': {ref.property} "
                        f"targets missing screen '{ref.target}'",
                        screen_id,
                        ref.node_id,
                    )
                )
        context = BindingContext.for_screen(app, screen_id, symbols, routes)
        for issue in check_bindings(tree, context):
            issues.append(
                ReferenceIssue(
                    "binding",
                    issue.binding_path,
                    f"Screen '{screen_id}', node '{issue.node_id}': {issue.message}",
                    screen_id,
                    issue.node_id,
                )
            )
    return issues


# =============================================================================
# Warnings
# =============================================================================


def _nested_stacks(
    node: NormalizedNode, inside_stack: bool, found: list[NormalizedNode]
) -> None:
    is_stack = node.type == "navigationstack"
    if is_stack and inside_stack:
        found.append(node)
    for child in node.children:
        _nested_stacks(child, inside_stack or is_stack, found)


def _reachable(app: AppDefinition, edges: list[NavigationEdge]) -> set[str]:
    roots = [app.entry_screen]
    if app.tab_bar is not None:
        roots.extend(tab.screen for tab in app.tab_bar.tabs)
    graph: dict[str | None, list[str]] = {}
    for edge in edges:
        graph.setdefault(edge.source, []).append(edge.target)
    reached: set[str] = set()
    stack = list(roots)
    while stack:
        screen_id = stack.pop()
        if screen_id in reached:
            continue
        reached.add(screen_id)
        stack.extend(graph.get(screen_id, ()))
    return reached


def collect_warnings(
    app: AppDefinition,
    trees: Mapping[str, NormalizedTree],
    results: Mapping[str, BuildResult],
    settings: GeneratorSettings,
    symbols: Mapping[str, ScreenSymbol],
) -> list[str]:
    """Non-fatal findings, in a fixed order."""
    warnings: list[str] = []
    edges = [edge for result in results.values() for edge in result.edges]
    pushed = {edge.target for edge in edges if edge.kind == EdgeKind.PUSH}
    roots = {app.entry_screen}
    if app.tab_bar is not None:
        roots.update(tab.screen for tab in app.tab_bar.tabs)

    for screen_id, tree in trees.items():
        if tree.max_depth > settings.depth_warning:
            warnings.append(
                f"Screen '{screen_id}' nests {tree.max_depth} levels deep "
                f"(more than {settings.depth_warning}); consider extracting subviews"
            )
        in_stack = screen_id in pushed or (
            screen_id in roots and not symbols[screen_id].owns_stack
        )
        nested: list[NormalizedNode] = []
        _nested_stacks(tree.root, in_stack, nested)
        for node in nested:
            warnings.append(
                f"Screen '{screen_id}': navigationstack '{node.id}' is nested "
                "inside another navigation stack"
            )
        for text in results[screen_id].warnings:
            warnings.append(f"Screen '{screen_id}': {text}")

    used = {decl.name for result in results.values() for decl in result.state}
    for model in app.models:
        if model.instance_name not in used:
            warnings.append(f"Data model '{model.name}' is not used by any screen")

    reached = _reachable(app, edges)
    for screen_id in trees:
        if screen_id not in reached:
            warnings.append(f"Screen '{screen_id}' is unreachable from the entry screen")

    paths: dict[str, str] = {}
    for screen in app.screens:
        if screen.path is None:
            continue
        if screen.path in paths:
            warnings.append(
                f"Deep link path '{screen.path}' is used by both "
                f"'{paths[screen.path]}' and '{screen.id}'"
            )
        else:
            paths[screen.path] = screen.id
    return warnings


# =============================================================================
# Generation
# =============================================================================


def _screen_file(
    screen: Screen,
    tree: NormalizedTree,
    tokens: DesignTokens,
    context: BindingContext,
    symbol: ScreenSymbol,
    catalog: ComponentCatalog,
) -> tuple[GeneratedFile, BuildResult]:
    try:
        result = build(tree, tokens, context, catalog)
        imports = ("SwiftData", "SwiftUI") if "swiftdata" in result.features else ("SwiftUI",)
        view = ViewFile(
            name=symbol.view,
            imports=imports,
            parameters=result.parameters,
            environment=result.environment,
            state=result.state,
            body=result.body,
            helpers=result.helpers,
        )
        content = print_view_file(view)
    except CodegenError as e:
        raise e.in_screen(screen.id) from None
    logger.debug("Printed screen '%s' as %s", screen.id, symbol.view)
    return GeneratedFile(f"Views/{symbol.view}.swift", content), result


def generate(
    app: AppDefinition | Mapping[str, Any],
    settings: GeneratorSettings | None = None,
    catalog: ComponentCatalog = CATALOG,
) -> CodegenResult:
    """Generate the Swift sources of an app.

    Args:
        app: App definition, or its JSON-shaped mapping.
        settings: Limits and worker count; read from the environment
            when omitted.
        catalog: Component catalog to validate against.

    Returns:
        CodegenResult: Files, warnings, tokens and navigation edges.

    Raises:
        SchemaError: A screen tree violates the catalog (tagged with the screen).
        ResourceLimitExceeded: A screen tree is too deep or too large.
        CrossReferenceError: Every dangling reference and binding, aggregated.
        InvariantError: Builder or printer out of sync with the catalog.
    """
    app = load_app(app)
    settings = settings or GeneratorSettings.from_environment()
    limits = TreeLimits.from_settings(settings)
    logger.info("Generating '%s': %d screen(s)", app.config.name, len(app.screens))

    trees = _normalize_screens(app, catalog, limits)
    symbols = assign_symbols(app, trees)
    routes = push_targets(app, trees)

    issues = check_references(app, trees, symbols, frozenset(routes))
    if issues:
        logger.info("Cross-reference validation failed with %d issue(s)", len(issues))
        raise CrossReferenceError(issues)

    tokens = tokens_from_config(app.config)
    logger.info("Resolved tokens '%s'", tokens.name)

    screens = [app.get_screen(screen_id) for screen_id in trees]

    def render(screen: Screen) -> tuple[GeneratedFile, BuildResult]:
        context = BindingContext.for_screen(app, screen.id, symbols, frozenset(routes))
        return _screen_file(
            screen, trees[screen.id], tokens, context, symbols[screen.id], catalog
        )

    if settings.workers > 1 and len(screens) > 1:
        with ThreadPoolExecutor(max_workers=settings.workers) as pool:
            rendered = list(pool.map(render, screens))
    else:
        rendered = [render(screen) for screen in screens]

    results = {screen.id: result for screen, (_, result) in zip(screens, rendered)}
    warnings = collect_warnings(app, trees, results, settings, symbols)
    for warning in warnings:
        logger.warning(warning)

    files = [file for file, _ in rendered]
    for model in app.models:
        if model.is_persisted:
            content = print_model_file(build_model(model))
            files.append(GeneratedFile(f"Models/{model.name}.swift", content))
    entry = build_entry(app, tokens, symbols, routes)
    files.append(GeneratedFile(f"{entry.app_name}.swift", print_entry_file(entry)))

    logger.info("Generated %d file(s) with %d warning(s)", len(files), len(warnings))
    return CodegenResult(
        files=tuple(files),
        warnings=tuple(warnings),
        tokens=tokens,
        navigation=tuple(edge for result in results.values() for edge in result.edges),
    )


__all__ = [
    "GeneratedFile",
    "CodegenResult",
    "load_app",
    "assign_symbols",
    "push_targets",
    "check_references",
    "collect_warnings",
    "generate",
]
