"""AST builder: lowers normalized trees into the SwiftUI IR.

Each component type and each modifier has one lowering rule, looked up by
its tag in a read-only table. Rules resolve design tokens to Swift value
expressions at build time, so the printer stays purely syntactic.

Bindings are analysed for a whole tree before lowering: state variables
get their Swift type from the properties they are bound to, and every
unresolvable path is reported as ``UnresolvedBindingSource``.
"""

import json
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, assert_never

from swiftship.catalog import CATALOG, BindableProperty, ComponentCatalog, ValueType
from swiftship.core.errors import InvariantError, UnknownModifier, UnresolvedBindingSource
from swiftship.definition import (
    AppDefinition,
    BindingSource,
    CustomAction,
    DataBinding,
    DataModel,
    DismissAction,
    Modifier,
    NavigateAction,
    PropertyType,
    ScreenParameter,
    SheetAction,
    parse_action,
)
from swiftship.ir import (
    ActionBlock,
    Argument,
    ArrayLit,
    Assign,
    BindingRef,
    BoolLit,
    Call,
    Conditional,
    Container,
    EdgeKind,
    EntryFile,
    EnumCase,
    EnvironmentDecl,
    HelperFunc,
    Identifier,
    Labeled,
    Leaf,
    ModelFile,
    Modified,
    ModifierExpr,
    NavigationEdge,
    NumberLit,
    ParameterDecl,
    PropertyDecl,
    RangeLit,
    RouteCase,
    RouteRef,
    StateDecl,
    StringLit,
    UiExpr,
    ValueExpr,
    camel_case,
    pascal_case,
)
from swiftship.normalizer import NormalizedNode, NormalizedTree
from swiftship.tokens import DesignTokens, TokenResolver, swift_case

logger = logging.getLogger(__name__)

# Environment values a binding may read, with their Swift types.
ENVIRONMENT_KEYS: dict[str, str] = {
    "calendar": "Calendar",
    "colorScheme": "ColorScheme",
    "dismiss": "DismissAction",
    "horizontalSizeClass": "UserInterfaceSizeClass?",
    "isEnabled": "Bool",
    "locale": "Locale",
    "modelContext": "ModelContext",
    "openURL": "OpenURLAction",
    "timeZone": "TimeZone",
    "verticalSizeClass": "UserInterfaceSizeClass?",
}

_VALUE_TYPES = {
    PropertyType.STRING: ValueType.STRING,
    PropertyType.INT: ValueType.INT,
    PropertyType.DOUBLE: ValueType.DOUBLE,
    PropertyType.BOOL: ValueType.BOOL,
    PropertyType.DATE: ValueType.DATE,
}

# Component types lowered into a modifier on their parent.
_HOISTED = frozenset({"toolbar"})

# Containers whose toolbar belongs to their content rather than to themselves.
_TOOLBAR_INSIDE = frozenset({"navigationstack"})

# Members every generated view may declare besides bound state.
_MEMBERS = frozenset({"body", *ENVIRONMENT_KEYS})


# =============================================================================
# Swift types and literals
# =============================================================================


def swift_type(kind: PropertyType | str, element: PropertyType | str | None = None) -> str:
    """Swift spelling of a property type tag."""
    match PropertyType(kind):
        case PropertyType.STRING:
            return "String"
        case PropertyType.INT:
            return "Int"
        case PropertyType.DOUBLE:
            return "Double"
        case PropertyType.BOOL:
            return "Bool"
        case PropertyType.DATE:
            return "Date"
        case PropertyType.ARRAY:
            return f"[{swift_type(element or PropertyType.STRING)}]"
        case PropertyType.OPTIONAL:
            return f"{swift_type(element or PropertyType.STRING)}?"
        case unreachable:
            assert_never(unreachable)


def zero_value(kind: PropertyType | str) -> ValueExpr:
    match PropertyType(kind):
        case PropertyType.STRING:
            return StringLit("")
        case PropertyType.INT | PropertyType.DOUBLE:
            return NumberLit(0)
        case PropertyType.BOOL:
            return BoolLit(False)
        case PropertyType.DATE:
            return EnumCase("now")
        case PropertyType.ARRAY:
            return ArrayLit()
        case PropertyType.OPTIONAL:
            return Identifier("nil")
        case unreachable:
            assert_never(unreachable)


def typed_literal(
    value: Any, kind: PropertyType | str, element: PropertyType | str | None = None
) -> ValueExpr:
    """Literal for a default value already checked against its type tag.

    Dates are seconds since 1970.
    """
    kind = PropertyType(kind)
    if value is None:
        return zero_value(kind)
    match kind:
        case PropertyType.ARRAY:
            item_kind = element or PropertyType.STRING
            return ArrayLit(tuple(typed_literal(item, item_kind) for item in value))
        case PropertyType.OPTIONAL:
            return typed_literal(value, element or PropertyType.STRING)
        case PropertyType.DATE:
            return Call("Date", (Argument("timeIntervalSince1970", NumberLit(value)),))
        case _:
            return json_literal(value)


def json_literal(value: Any) -> ValueExpr:
    """Best Swift literal for an arbitrary JSON value."""
    if value is None:
        return Identifier("nil")
    if isinstance(value, bool):
        return BoolLit(value)
    if isinstance(value, (int, float)):
        return NumberLit(value)
    if isinstance(value, str):
        return StringLit(value)
    if isinstance(value, list):
        return ArrayLit(tuple(json_literal(item) for item in value))
    return StringLit(json.dumps(value, sort_keys=True))


def _case(value: str) -> EnumCase:
    """Snake-case wire value to an enum case (``inset_grouped`` -> ``.insetGrouped``)."""
    if value == "url":
        return EnumCase("URL")
    return EnumCase(swift_case(value)[1:])


def _args(*values: ValueExpr, **labeled: ValueExpr | None) -> tuple[Argument, ...]:
    args = [Argument(None, value) for value in values]
    args.extend(Argument(label, v) for label, v in labeled.items() if v is not None)
    return tuple(args)


def _mod(name: str, *values: ValueExpr, **labeled: ValueExpr | None) -> ModifierExpr:
    return ModifierExpr(name, _args(*values, **labeled))


def _attach(expr: UiExpr, modifiers: list[ModifierExpr]) -> UiExpr:
    """Chain modifiers onto an expression, flattening nested chains."""
    if not modifiers:
        return expr
    match expr:
        case Modified(inner=inner, modifiers=existing):
            return Modified(inner, existing + tuple(modifiers))
        case Conditional():
            return Modified(Container("Group", (expr,)), tuple(modifiers))
        case Container() | Leaf():
            return Modified(expr, tuple(modifiers))
        case unreachable:
            assert_never(unreachable)


def _single(children: tuple[UiExpr, ...]) -> UiExpr:
    if len(children) == 1:
        return children[0]
    return Container("Group", children)


# =============================================================================
# Binding context
# =============================================================================


@dataclass(frozen=True)
class ScreenSymbol:
    """Swift names generated for a screen.

    Attributes:
        screen_id: Screen id.
        view: View struct name.
        route: ``AppRoute`` case name.
        owns_stack: The screen's root is a ``NavigationStack``.
    """

    screen_id: str
    view: str
    route: str
    owns_stack: bool = False

    @classmethod
    def derive(cls, screen_id: str, name: str | None = None) -> "ScreenSymbol":
        return cls(screen_id, pascal_case(name or screen_id) + "View", camel_case(screen_id))


@dataclass(frozen=True)
class BindingContext:
    """Sources a screen's bindings can resolve against.

    Attributes:
        screen_id: Screen being built (source of navigation edges).
        parameters: Declared screen parameters by name.
        models: Data models by instance name (``todoItem``).
        symbols: Swift names of every screen by id.
        routes: Screen ids with an ``AppRoute`` case, or None when unknown.
    """

    screen_id: str | None = None
    parameters: Mapping[str, ScreenParameter] = field(default_factory=dict)
    models: Mapping[str, DataModel] = field(default_factory=dict)
    symbols: Mapping[str, ScreenSymbol] = field(default_factory=dict)
    routes: frozenset[str] | None = None

    @classmethod
    def for_screen(
        cls,
        app: AppDefinition,
        screen_id: str,
        symbols: Mapping[str, ScreenSymbol] | None = None,
        routes: frozenset[str] | None = None,
    ) -> "BindingContext":
        screen = app.get_screen(screen_id)
        if screen is None:
            raise KeyError(screen_id)
        return cls(
            screen_id=screen.id,
            parameters={param.name: param for param in screen.parameters},
            models={model.instance_name: model for model in app.models},
            symbols=symbols or {},
            routes=routes,
        )

    def symbol(self, screen_id: str) -> ScreenSymbol:
        return self.symbols.get(screen_id) or ScreenSymbol.derive(screen_id)

    @property
    def has_routes(self) -> bool:
        return self.routes is None or bool(self.routes)


@dataclass
class BindingAnalysis:
    """Result of resolving every binding of one tree.

    Attributes:
        refs: Resolved reference per ``(node_id, property)``.
        state: State declarations, in order of first use.
        environment: Environment declarations, in order of first use.
        issues: Every binding that did not resolve.
    """

    refs: dict[tuple[str, str], BindingRef] = field(default_factory=dict)
    state: dict[str, StateDecl] = field(default_factory=dict)
    environment: dict[str, EnvironmentDecl] = field(default_factory=dict)
    issues: list[UnresolvedBindingSource] = field(default_factory=list)


@dataclass(frozen=True)
class _Use:
    node: NormalizedNode
    binding: DataBinding
    prop: BindableProperty

    @property
    def is_display(self) -> bool:
        """One-way text accepts any value through string interpolation."""
        return not self.prop.two_way and self.prop.value_type == ValueType.STRING


class _Analyzer:
    def __init__(self, context: BindingContext):
        self.context = context
        self.result = BindingAnalysis()
        self.state_uses: dict[str, list[_Use]] = {}

    def issue(self, use: _Use, reason: str) -> None:
        self.result.issues.append(
            UnresolvedBindingSource(
                use.binding.source, use.binding.path, reason, use.node.id, use.node.path
            )
        )

    def typed(
        self,
        use: _Use,
        source: BindingSource,
        path: str,
        value_type: ValueType | None,
        type_name: str,
    ) -> None:
        """Record a reference if the value type fits the bound property."""
        key = (use.node.id, use.binding.property)
        if value_type == use.prop.value_type:
            self.result.refs[key] = BindingRef(source, path, two_way=use.prop.two_way)
        elif use.is_display:
            self.result.refs[key] = BindingRef(source, path, interpolate=True)
        else:
            self.issue(
                use,
                f"'{use.binding.property}' expects {use.prop.value_type.swift_type}, "
                f"found {type_name}",
            )

    def visit(self, use: _Use) -> None:
        match BindingSource(use.binding.source):
            case BindingSource.STATE:
                self.state(use)
            case BindingSource.ENVIRONMENT:
                self.environment(use)
            case BindingSource.PARAMETER:
                self.parameter(use)
            case unreachable:
                assert_never(unreachable)

    def state(self, use: _Use) -> None:
        segments = use.binding.segments
        root = segments[0]
        if root in self.context.parameters:
            self.issue(use, f"'{root}' is already a screen parameter")
            return
        if root in ENVIRONMENT_KEYS:
            self.issue(use, f"'{root}' would shadow an environment value")
            return
        model = self.context.models.get(root)
        if len(segments) == 1:
            if model is not None:
                self.declare_model(model)
                self.typed(use, BindingSource.STATE, root, None, model.name)
            else:
                self.state_uses.setdefault(root, []).append(use)
                self.result.state.setdefault(root, None)
            return
        if model is None:
            self.issue(use, f"'{root}' is not a data model instance")
            return
        if len(segments) > 2:
            self.issue(use, "nested member paths are not supported")
            return
        prop = next((p for p in model.properties if p.name == segments[1]), None)
        if prop is None:
            self.issue(use, f"'{model.name}' has no property '{segments[1]}'")
            return
        self.declare_model(model)
        value_type = None if prop.is_optional else _VALUE_TYPES.get(PropertyType(prop.type))
        type_name = swift_type(prop.type, prop.element_type)
        self.typed(use, BindingSource.STATE, use.binding.path, value_type, type_name)

    def declare_model(self, model: DataModel) -> None:
        self.result.state[model.instance_name] = StateDecl(
            model.instance_name, None, Call(model.name)
        )

    def environment(self, use: _Use) -> None:
        root = use.binding.root
        if use.prop.two_way:
            self.issue(use, "environment values are read-only")
            return
        if root not in ENVIRONMENT_KEYS:
            self.issue(use, f"'{root}' is not a known environment value")
            return
        self.result.environment.setdefault(root, EnvironmentDecl(root, root))
        type_name = ENVIRONMENT_KEYS[root]
        value_type = ValueType.BOOL if type_name == "Bool" else None
        if len(use.binding.segments) > 1:
            value_type, type_name = None, "a member value"
        self.typed(use, BindingSource.ENVIRONMENT, use.binding.path, value_type, type_name)

    def parameter(self, use: _Use) -> None:
        root = use.binding.root
        param = self.context.parameters.get(root)
        if use.prop.two_way:
            self.issue(use, "parameters are read-only")
            return
        if param is None:
            self.issue(use, f"'{root}' is not a parameter of this screen")
            return
        if len(use.binding.segments) > 1:
            self.issue(use, f"parameter '{root}' has no members")
            return
        value_type = _VALUE_TYPES.get(PropertyType(param.type))
        type_name = swift_type(param.type, param.element_type)
        self.typed(use, BindingSource.PARAMETER, root, value_type, type_name)

    def finish(self) -> BindingAnalysis:
        """Infer a type for each plain state variable from its uses."""
        for root, uses in self.state_uses.items():
            strict = [use for use in uses if not use.is_display]
            value_type = strict[0].prop.value_type if strict else ValueType.STRING
            self.result.state[root] = StateDecl(
                root, value_type.swift_type, _zero_for(value_type)
            )
            for use in uses:
                self.typed(use, BindingSource.STATE, root, value_type, value_type.swift_type)
        return self.result


def _zero_for(value_type: ValueType) -> ValueExpr:
    return zero_value(PropertyType(value_type.value))


def analyze_bindings(
    tree: NormalizedTree, context: BindingContext | None = None
) -> BindingAnalysis:
    """Resolve every binding of a tree against its context."""
    analyzer = _Analyzer(context or BindingContext())
    for node in tree.iter_nodes():
        for binding in node.bindings:
            prop = node.meta.binding(binding.property)
            if prop is None:
                raise InvariantError(
                    f"'{binding.property}' is not bindable on '{node.type}'",
                    node.id,
                    node.path,
                )
            analyzer.visit(_Use(node, binding, prop))
    return analyzer.finish()


def check_bindings(
    tree: NormalizedTree, context: BindingContext | None = None
) -> list[UnresolvedBindingSource]:
    """All binding issues of a tree, for aggregation by the caller."""
    return analyze_bindings(tree, context).issues


# =============================================================================
# Build result
# =============================================================================


@dataclass(frozen=True)
class BuildResult:
    """IR and side tables for one screen.

    Attributes:
        body: Root view expression.
        edges: Navigation edges found in the tree.
        state: ``@State`` declarations.
        environment: ``@Environment`` declarations.
        parameters: Screen inputs.
        helpers: Stubs for custom actions.
        features: Framework features used (``swiftdata``, ``navigation_stack``).
        warnings: Non-fatal findings.
    """

    body: UiExpr
    edges: tuple[NavigationEdge, ...] = ()
    state: tuple[StateDecl, ...] = ()
    environment: tuple[EnvironmentDecl, ...] = ()
    parameters: tuple[ParameterDecl, ...] = ()
    helpers: tuple[HelperFunc, ...] = ()
    features: frozenset[str] = frozenset()
    warnings: tuple[str, ...] = ()


@dataclass
class _Parts:
    """What a component rule produces.

    ``style`` modifiers come from props and precede the node's own
    modifiers; ``attached`` ones (presentations) follow them.
    """

    expr: UiExpr
    style: list[ModifierExpr] = field(default_factory=list)
    attached: list[ModifierExpr] = field(default_factory=list)


@dataclass
class _ActionParts:
    block: ActionBlock
    attached: list[ModifierExpr] = field(default_factory=list)
    route: RouteRef | None = None


ComponentRule = Callable[["_Builder", NormalizedNode], _Parts]
ModifierRule = Callable[["_Builder", NormalizedNode, tuple[Any, ...]], ModifierExpr]

COMPONENT_RULES: dict[str, ComponentRule] = {}
MODIFIER_RULES: dict[str, ModifierRule] = {}


def component_rule(*type_tags: str):
    """Register the lowering rule of one or more component types."""

    def register(func: ComponentRule) -> ComponentRule:
        for tag in type_tags:
            COMPONENT_RULES[tag] = func
        return func

    return register


def modifier_rule(name: str):
    def register(func: ModifierRule) -> ModifierRule:
        MODIFIER_RULES[name] = func
        return func

    return register


# =============================================================================
# Builder
# =============================================================================


class _Builder:
    def __init__(
        self,
        tokens: DesignTokens,
        context: BindingContext,
        analysis: BindingAnalysis,
        catalog: ComponentCatalog,
    ):
        self.resolver = TokenResolver(tokens)
        self.context = context
        self.catalog = catalog
        self.refs = analysis.refs
        self.state = dict(analysis.state)
        self.environment = dict(analysis.environment)
        self.helpers: dict[str, HelperFunc] = {}
        self.custom: dict[str, str] = {}
        self.edges: list[NavigationEdge] = []
        self.features: set[str] = set()
        self.warnings: list[str] = []
        if "modelContext" in self.environment:
            self.features.add("swiftdata")

    # ------------------------------------------------------------------
    # Tree
    # ------------------------------------------------------------------

    def lower(self, node: NormalizedNode) -> UiExpr:
        rule = COMPONENT_RULES.get(node.type)
        if rule is None:
            raise InvariantError(
                f"No lowering rule for component type '{node.type}'", node.id, node.path
            )
        parts = rule(self, node)
        modifiers = [
            *parts.style,
            *(self.modifier(node, modifier) for modifier in node.modifiers),
            *parts.attached,
        ]
        if node.type not in _TOOLBAR_INSIDE:
            modifiers.extend(self.toolbar(node))
        expr = _attach(parts.expr, modifiers)
        visible = self.refs.get((node.id, "is_visible"))
        if visible is not None:
            expr = Conditional(visible, expr)
        return expr

    def children(self, node: NormalizedNode) -> tuple[UiExpr, ...]:
        return tuple(
            self.lower(child) for child in node.children if child.type not in _HOISTED
        )

    def toolbar(self, node: NormalizedNode) -> list[ModifierExpr]:
        """The ``.toolbar`` modifier for hoisted toolbar children, if any."""
        toolbars = [child for child in node.children if child.type in _HOISTED]
        if not toolbars:
            return []
        content = tuple(self.toolbar_group(toolbar) for toolbar in toolbars)
        return [ModifierExpr("toolbar", content=content)]

    def toolbar_group(self, node: NormalizedNode) -> UiExpr:
        group = Container(
            "ToolbarItemGroup",
            self.children(node),
            _args(placement=_case(node.props["placement"])),
        )
        visible = self.refs.get((node.id, "is_visible"))
        return Conditional(visible, group) if visible is not None else group

    def modifier(self, node: NormalizedNode, modifier: Modifier) -> ModifierExpr:
        try:
            spec = self.catalog.modifier(modifier.name)
        except UnknownModifier as e:
            raise UnknownModifier(modifier.name, node.id, node.path) from e
        rule = MODIFIER_RULES.get(spec.name)
        if rule is None:
            raise UnknownModifier(modifier.name, node.id, node.path)
        arguments = tuple(modifier.arguments)
        arguments += (None,) * (len(spec.arguments) - len(arguments))
        expr = rule(self, node, arguments)
        return ModifierExpr(
            spec.swift_name, expr.arguments, expr.content, expr.parameter, expr.labeled
        )

    # ------------------------------------------------------------------
    # Values
    # ------------------------------------------------------------------

    def value(self, node: NormalizedNode, name: str, literal: ValueExpr) -> ValueExpr:
        """Bound reference if the property is bound, else the literal."""
        return self.refs.get((node.id, name)) or literal

    def text(self, node: NormalizedNode, name: str) -> ValueExpr | None:
        """Bound reference, string literal, or None when the prop is unset."""
        ref = self.refs.get((node.id, name))
        if ref is not None:
            return ref
        if name in node.props:
            return StringLit(node.props[name])
        return None

    def two_way(
        self, node: NormalizedNode, name: str, literal: ValueExpr
    ) -> tuple[ValueExpr, BindingRef | None]:
        """``$binding`` for bound controls, ``.constant(literal)`` otherwise."""
        ref = self.refs.get((node.id, name))
        if ref is not None:
            return ref, ref
        self.warnings.append(
            f"'{node.id}': '{name}' is not bound to state; the control is read-only"
        )
        return Call(".constant", _args(literal)), None

    def color(self, node: NormalizedNode, slot: str) -> ValueExpr:
        return self.resolver.color(slot, node.id)

    def spacing(self, node: NormalizedNode, slot: str) -> ValueExpr:
        return self.resolver.spacing(slot, node.id)

    def clip(self, node: NormalizedNode, slot: str) -> ModifierExpr:
        radius = self.resolver.radius(slot, node.id)
        if slot == "full":
            return _mod("clipShape", Call("Capsule"))
        return _mod("clipShape", Call("RoundedRectangle", _args(cornerRadius=radius)))

    # ------------------------------------------------------------------
    # State, navigation, actions
    # ------------------------------------------------------------------

    def unique(self, base: str) -> str:
        """First free member name of the view starting at ``base``."""
        name, suffix = base, 2
        while (
            name in self.state
            or name in self.environment
            or name in self.context.parameters
            or name in self.helpers
            or name in _MEMBERS
        ):
            name, suffix = f"{base}{suffix}", suffix + 1
        return name

    def flag(self, node: NormalizedNode, *parts: str) -> BindingRef:
        """Declare a generated ``Bool`` presentation flag."""
        base = camel_case(" ".join(("is", node.id, *parts, "presented")))
        name = self.unique(base)
        self.state[name] = StateDecl(name, None, BoolLit(False))
        return BindingRef(BindingSource.STATE, name, two_way=True)

    def presented(self, node: NormalizedNode) -> BindingRef:
        return self.refs.get((node.id, "is_presented")) or self.flag(node)

    def edge(self, node: NormalizedNode, target: str, kind: EdgeKind) -> None:
        self.edges.append(NavigationEdge(self.context.screen_id, target, kind, node.id))

    def destination(self, target: str) -> Leaf:
        return Leaf(self.context.symbol(target).view)

    def route(self, node: NormalizedNode, target: str) -> RouteRef:
        self.edge(node, target, EdgeKind.PUSH)
        return RouteRef(self.context.symbol(target).route, target)

    def route_destination(self) -> list[ModifierExpr]:
        if not self.context.has_routes:
            return []
        return [route_destination()]

    def dismiss(self) -> None:
        self.environment.setdefault("dismiss", EnvironmentDecl("dismiss", "dismiss"))

    def action(
        self, node: NormalizedNode, raw: Mapping[str, Any], *where: str, link: bool = False
    ) -> _ActionParts:
        """Lower one action.

        With ``link`` a navigate action becomes a route for a
        ``NavigationLink``; otherwise it is presented through a flag.
        """
        match parse_action(raw):
            case NavigateAction(destination=target) if link:
                return _ActionParts(ActionBlock(), route=self.route(node, target))
            case NavigateAction(destination=target):
                self.edge(node, target, EdgeKind.PUSH)
                flag = self.flag(node, *where)
                present = ModifierExpr(
                    "navigationDestination",
                    _args(isPresented=flag),
                    content=(self.destination(target),),
                )
                return _ActionParts(_raise(flag), [present])
            case SheetAction(destination=target):
                self.edge(node, target, EdgeKind.SHEET)
                flag = self.flag(node, *where)
                sheet = ModifierExpr(
                    "sheet", _args(isPresented=flag), content=(self.destination(target),)
                )
                return _ActionParts(_raise(flag), [sheet])
            case DismissAction():
                self.dismiss()
                return _ActionParts(ActionBlock((Call("dismiss"),)))
            case CustomAction(name=name, parameters=parameters):
                helper = self.custom.get(name)
                if helper is None:
                    helper = self.unique(camel_case(name))
                    self.custom[name] = helper
                    self.helpers[helper] = HelperFunc(
                        helper,
                        tuple(
                            (key, json_literal(parameters[key]))
                            for key in sorted(parameters)
                        ),
                    )
                return _ActionParts(ActionBlock((Call(helper),)))
            case unreachable:
                assert_never(unreachable)

    def buttons(
        self, node: NormalizedNode, items: list[dict[str, Any]], key: str
    ) -> tuple[tuple[UiExpr, ...], list[ModifierExpr]]:
        """Buttons for alert, dialog and menu items."""
        buttons: list[UiExpr] = []
        attached: list[ModifierExpr] = []
        for index, item in enumerate(items):
            block = ActionBlock()
            if "action" in item:
                parts = self.action(node, item["action"], key, str(index))
                block = parts.block
                attached.extend(parts.attached)
            role = item.get("role", "default")
            buttons.append(
                Leaf(
                    "Button",
                    StringLit(item["label"]),
                    _args(
                        systemImage=StringLit(item["icon"]) if item.get("icon") else None,
                        role=_case(role) if role != "default" else None,
                    )
                    + _args(block),
                )
            )
        return tuple(buttons), attached

    def result(self, body: UiExpr) -> BuildResult:
        parameters = tuple(
            ParameterDecl(
                param.name,
                swift_type(param.type, param.element_type),
                typed_literal(param.default, param.type, param.element_type),
            )
            for param in self.context.parameters.values()
        )
        return BuildResult(
            body=body,
            edges=tuple(self.edges),
            state=tuple(self.state.values()),
            environment=tuple(self.environment.values()),
            parameters=parameters,
            helpers=tuple(self.helpers.values()),
            features=frozenset(self.features),
            warnings=tuple(self.warnings),
        )


def _raise(flag: BindingRef) -> ActionBlock:
    return ActionBlock((Assign(flag.path, BoolLit(True)),))


def route_destination() -> ModifierExpr:
    """``.navigationDestination(for: AppRoute.self) { route in ... }``."""
    return ModifierExpr(
        "navigationDestination",
        _args(**{"for": Identifier("AppRoute.self")}),
        content=(Leaf("RouteDestination", None, _args(route=Identifier("route"))),),
        parameter="route",
    )


def _trigger(label: str, flag: BindingRef) -> Leaf:
    return Leaf("Button", StringLit(label), _args(_raise(flag)))


# =============================================================================
# Component rules: primitives
# =============================================================================


@component_rule("text")
def _text(b: _Builder, node: NormalizedNode) -> _Parts:
    props = node.props
    parts = _Parts(Leaf("Text", b.value(node, "content", StringLit(props["content"]))))
    if "size" in props:
        parts.style.append(_mod("font", b.resolver.font_size(props["size"], node.id)))
    elif props["font"] != "body":
        parts.style.append(_mod("font", _case(props["font"])))
    if "weight" in props:
        parts.style.append(_mod("fontWeight", _case(props["weight"])))
    if "color" in props:
        parts.style.append(_mod("foregroundStyle", b.color(node, props["color"])))
    if "alignment" in props:
        parts.style.append(_mod("multilineTextAlignment", _case(props["alignment"])))
    if "line_limit" in props:
        parts.style.append(_mod("lineLimit", NumberLit(props["line_limit"])))
    return parts


@component_rule("button")
def _button(b: _Builder, node: NormalizedNode) -> _Parts:
    props = node.props
    label = b.value(node, "label", StringLit(props["label"]))
    icon = StringLit(props["icon"]) if "icon" in props else None
    role = _case(props["role"]) if props["role"] != "none" else None
    action = _ActionParts(ActionBlock())
    if "action" in props:
        action = b.action(node, props["action"], link=True)

    if action.route is not None:
        if icon is not None:
            expr = Container(
                "NavigationLink",
                (Leaf("Label", label, _args(systemImage=icon)),),
                _args(value=action.route),
            )
        else:
            expr = Leaf("NavigationLink", label, _args(value=action.route))
    elif icon is not None and props["icon_position"] == "trailing":
        image = Leaf("Image", None, _args(systemName=icon))
        row = Container("HStack", (Leaf("Text", label), image))
        expr = Container("Button", (row,), _args(role=role, action=action.block))
    else:
        expr = Leaf("Button", label, _args(systemImage=icon, role=role) + _args(action.block))

    parts = _Parts(expr, [_mod("buttonStyle", _case(props["style"]))], action.attached)
    if "tint" in props:
        parts.style.append(_mod("tint", b.color(node, props["tint"])))
    disabled = b.refs.get((node.id, "is_disabled"))
    if disabled is not None:
        parts.style.append(_mod("disabled", disabled))
    elif props["is_disabled"] or props["is_loading"]:
        parts.style.append(_mod("disabled", BoolLit(True)))
    if props["is_loading"]:
        parts.style.append(ModifierExpr("overlay", content=(Leaf("ProgressView"),)))
    return parts


@component_rule("image")
def _image(b: _Builder, node: NormalizedNode) -> _Parts:
    props = node.props
    match props["source"]:
        case "url":
            url = Call("URL", _args(string=StringLit(props["url"])))
            parts = _Parts(Leaf("AsyncImage", None, _args(url=url)))
        case source:
            name = b.value(node, "name", StringLit(props["name"]))
            if source == "system":
                expr = Leaf("Image", None, _args(systemName=name))
            else:
                expr = Leaf("Image", name)
            parts = _Parts(
                expr,
                [
                    ModifierExpr("resizable"),
                    _mod("aspectRatio", contentMode=_case(props["content_mode"])),
                ],
            )
    if "width" in props or "height" in props:
        parts.style.append(
            _mod(
                "frame",
                width=NumberLit(props["width"]) if "width" in props else None,
                height=NumberLit(props["height"]) if "height" in props else None,
            )
        )
    if props["corner_radius"] != "none":
        parts.style.append(b.clip(node, props["corner_radius"]))
    return parts


@component_rule("icon")
def _icon(b: _Builder, node: NormalizedNode) -> _Parts:
    props = node.props
    name = b.value(node, "name", StringLit(props["name"]))
    parts = _Parts(
        Leaf("Image", None, _args(systemName=name)),
        [_mod("imageScale", _case(props["size"]))],
    )
    if props["weight"] != "regular":
        parts.style.append(_mod("fontWeight", _case(props["weight"])))
    if "color" in props:
        parts.style.append(_mod("foregroundStyle", b.color(node, props["color"])))
    if props["rendering_mode"] != "monochrome":
        parts.style.append(_mod("symbolRenderingMode", _case(props["rendering_mode"])))
    return parts


@component_rule("spacer")
def _spacer(b: _Builder, node: NormalizedNode) -> _Parts:
    min_length = node.props.get("min_length")
    length = NumberLit(min_length) if min_length is not None else None
    return _Parts(Leaf("Spacer", None, _args(minLength=length)))


@component_rule("divider")
def _divider(b: _Builder, node: NormalizedNode) -> _Parts:
    return _Parts(Leaf("Divider"))


# =============================================================================
# Component rules: layout
# =============================================================================


@component_rule("vstack", "hstack")
def _stack(b: _Builder, node: NormalizedNode) -> _Parts:
    kind = "VStack" if node.type == "vstack" else "HStack"
    params = _args(
        alignment=_case(node.props["alignment"]),
        spacing=b.spacing(node, node.props["spacing"]),
    )
    return _Parts(Container(kind, b.children(node), params))


@component_rule("zstack")
def _zstack(b: _Builder, node: NormalizedNode) -> _Parts:
    params = _args(alignment=_case(node.props["alignment"]))
    return _Parts(Container("ZStack", b.children(node), params))


@component_rule("scrollview")
def _scrollview(b: _Builder, node: NormalizedNode) -> _Parts:
    axes: ValueExpr
    if node.props["axes"] == "both":
        axes = ArrayLit((EnumCase("horizontal"), EnumCase("vertical")))
    else:
        axes = _case(node.props["axes"])
    params = _args(axes, showsIndicators=BoolLit(node.props["shows_indicators"]))
    return _Parts(Container("ScrollView", b.children(node), params))


@component_rule("list")
def _list(b: _Builder, node: NormalizedNode) -> _Parts:
    rows = b.children(node)
    if not node.props["shows_row_separators"]:
        hidden = [_mod("listRowSeparator", EnumCase("hidden"))]
        rows = tuple(_attach(row, hidden) for row in rows)
    parts = _Parts(Container("List", rows))
    if node.props["style"] != "automatic":
        parts.style.append(_mod("listStyle", _case(node.props["style"])))
    return parts


@component_rule("grid")
def _grid(b: _Builder, node: NormalizedNode) -> _Parts:
    column = Call("GridItem", _args(Call(".flexible")))
    columns = Call(
        "Array", _args(repeating=column, count=NumberLit(node.props["columns"]))
    )
    params = _args(columns=columns, spacing=b.spacing(node, node.props["spacing"]))
    return _Parts(Container("LazyVGrid", b.children(node), params))


@component_rule("section")
def _section(b: _Builder, node: NormalizedNode) -> _Parts:
    labeled = []
    for name in ("header", "footer"):
        text = b.text(node, name)
        if text is not None:
            labeled.append(Labeled(name, (Leaf("Text", text),)))
    return _Parts(Container("Section", b.children(node), labeled=tuple(labeled)))


# =============================================================================
# Component rules: input
# =============================================================================


def _text_input_style(props: dict[str, Any]) -> list[ModifierExpr]:
    style = []
    if props.get("keyboard_type", "default") != "default":
        style.append(_mod("keyboardType", _case(props["keyboard_type"])))
    if props.get("text_content_type", "none") != "none":
        style.append(_mod("textContentType", _case(props["text_content_type"])))
    if props.get("autocapitalization", "sentences") != "sentences":
        style.append(
            _mod("textInputAutocapitalization", _case(props["autocapitalization"]))
        )
    if not props.get("autocorrection", True):
        style.append(ModifierExpr("autocorrectionDisabled"))
    return style


@component_rule("textfield")
def _textfield(b: _Builder, node: NormalizedNode) -> _Parts:
    props = node.props
    text, ref = b.two_way(node, "text", StringLit(props["text"]))
    axis = EnumCase("vertical") if props["axis"] == "vertical" else None
    expr = Leaf(
        "TextField", StringLit(props["placeholder"]), _args(text=text, axis=axis), ref
    )
    return _Parts(expr, _text_input_style(props))


@component_rule("securefield")
def _securefield(b: _Builder, node: NormalizedNode) -> _Parts:
    props = node.props
    text, ref = b.two_way(node, "text", StringLit(props["text"]))
    expr = Leaf("SecureField", StringLit(props["placeholder"]), _args(text=text), ref)
    return _Parts(expr, _text_input_style(props))


@component_rule("texteditor")
def _texteditor(b: _Builder, node: NormalizedNode) -> _Parts:
    text, ref = b.two_way(node, "text", StringLit(node.props["text"]))
    return _Parts(
        Leaf("TextEditor", None, _args(text=text), ref),
        [_mod("frame", minHeight=NumberLit(node.props["min_height"]))],
    )


@component_rule("toggle")
def _toggle(b: _Builder, node: NormalizedNode) -> _Parts:
    is_on, ref = b.two_way(node, "is_on", BoolLit(node.props["is_on"]))
    label = b.value(node, "label", StringLit(node.props["label"]))
    return _Parts(Leaf("Toggle", label, _args(isOn=is_on), ref))


@component_rule("picker")
def _picker(b: _Builder, node: NormalizedNode) -> _Parts:
    props = node.props
    options = props["options"]
    initial = props.get("selection", options[0]["value"] if options else "")
    selection, _ = b.two_way(node, "selection", StringLit(initial))
    rows = tuple(
        Modified(
            Leaf("Text", StringLit(option["label"])),
            (_mod("tag", StringLit(option["value"])),),
        )
        for option in options
    )
    parts = _Parts(
        Container("Picker", rows, _args(StringLit(props["label"]), selection=selection))
    )
    if props["style"] != "automatic":
        parts.style.append(_mod("pickerStyle", _case(props["style"])))
    return parts


_DATE_COMPONENTS = {
    "date": (EnumCase("date"),),
    "hour_and_minute": (EnumCase("hourAndMinute"),),
    "date_and_time": (EnumCase("date"), EnumCase("hourAndMinute")),
}


@component_rule("datepicker")
def _datepicker(b: _Builder, node: NormalizedNode) -> _Parts:
    props = node.props
    selection, ref = b.two_way(node, "selection", EnumCase("now"))
    expr = Leaf(
        "DatePicker",
        StringLit(props["label"]),
        _args(
            selection=selection,
            displayedComponents=ArrayLit(_DATE_COMPONENTS[props["components"]]),
        ),
        ref,
    )
    parts = _Parts(expr)
    if props["style"] != "compact":
        parts.style.append(_mod("datePickerStyle", _case(props["style"])))
    return parts


@component_rule("slider")
def _slider(b: _Builder, node: NormalizedNode) -> _Parts:
    props = node.props
    value, ref = b.two_way(node, "value", NumberLit(props["value"]))
    params = _args(
        value=value,
        **{"in": RangeLit(NumberLit(props["min_value"]), NumberLit(props["max_value"]))},
        step=NumberLit(props["step"]) if "step" in props else None,
    )
    if "label" in props:
        return _Parts(Container("Slider", (Leaf("Text", StringLit(props["label"])),), params))
    return _Parts(Leaf("Slider", None, params, ref))


@component_rule("stepper")
def _stepper(b: _Builder, node: NormalizedNode) -> _Parts:
    props = node.props
    value, ref = b.two_way(node, "value", NumberLit(props["value"]))
    bounds = None
    if "min_value" in props or "max_value" in props:
        bounds = RangeLit(
            NumberLit(props["min_value"]) if "min_value" in props else Identifier("Int.min"),
            NumberLit(props["max_value"]) if "max_value" in props else Identifier("Int.max"),
        )
    params = _args(
        value=value,
        **{"in": bounds},
        step=NumberLit(props["step"]) if props["step"] != 1 else None,
    )
    return _Parts(Leaf("Stepper", StringLit(props["label"]), params, ref))


# =============================================================================
# Component rules: navigation
# =============================================================================


@component_rule("navigationstack")
def _navigationstack(b: _Builder, node: NormalizedNode) -> _Parts:
    b.features.add("navigation_stack")
    modifiers = []
    title = b.text(node, "title")
    if title is not None:
        modifiers.append(_mod("navigationTitle", title))
    if node.props["title_display_mode"] != "automatic":
        modifiers.append(
            _mod("navigationBarTitleDisplayMode", _case(node.props["title_display_mode"]))
        )
    modifiers.extend(b.route_destination())
    modifiers.extend(b.toolbar(node))
    content = _attach(_single(b.children(node)), modifiers)
    return _Parts(Container("NavigationStack", (content,)))


@component_rule("navigationlink")
def _navigationlink(b: _Builder, node: NormalizedNode) -> _Parts:
    route = b.route(node, node.props["destination"])
    children = b.children(node)
    if children:
        return _Parts(Container("NavigationLink", children, _args(value=route)))
    label = b.value(node, "label", StringLit(node.props["label"]))
    return _Parts(Leaf("NavigationLink", label, _args(value=route)))


@component_rule("tabview")
def _tabview(b: _Builder, node: NormalizedNode) -> _Parts:
    tabs = []
    for tab in node.props["tabs"]:
        b.edge(node, tab["screen"], EdgeKind.TAB)
        tabs.append(
            tab_item(b.destination(tab["screen"]), tab["title"], tab["icon"], tab.get("badge"))
        )
    parts = _Parts(Container("TabView", tuple(tabs)))
    if node.props["style"] == "page":
        parts.style.append(_mod("tabViewStyle", EnumCase("page")))
    return parts


def tab_item(view: UiExpr, title: str, icon: str, badge: int | None) -> UiExpr:
    """A tab's view with its ``.tabItem`` label and optional badge."""
    label = Leaf("Label", StringLit(title), _args(systemImage=StringLit(icon)))
    modifiers = [ModifierExpr("tabItem", content=(label,))]
    if badge is not None:
        modifiers.append(_mod("badge", NumberLit(badge)))
    return _attach(view, modifiers)


def _presentation(b: _Builder, node: NormalizedNode, kind: EdgeKind) -> _Parts:
    props = node.props
    flag = b.presented(node)
    if "destination" in props:
        b.edge(node, props["destination"], kind)
        content: UiExpr = b.destination(props["destination"])
    else:
        content = _single(b.children(node))
    inner = []
    if kind == EdgeKind.SHEET:
        if props["detents"] != ["large"]:
            detents = ArrayLit(tuple(_case(detent) for detent in props["detents"]))
            inner.append(_mod("presentationDetents", detents))
        if not props["shows_drag_indicator"]:
            inner.append(_mod("presentationDragIndicator", EnumCase("hidden")))
    if props["is_interactive_dismiss_disabled"]:
        inner.append(ModifierExpr("interactiveDismissDisabled"))
    name = "sheet" if kind == EdgeKind.SHEET else "fullScreenCover"
    present = ModifierExpr(
        name, _args(isPresented=flag), content=(_attach(content, inner),)
    )
    return _Parts(_trigger(props["trigger_label"], flag), attached=[present])


@component_rule("sheet")
def _sheet(b: _Builder, node: NormalizedNode) -> _Parts:
    return _presentation(b, node, EdgeKind.SHEET)


@component_rule("fullscreencover")
def _fullscreencover(b: _Builder, node: NormalizedNode) -> _Parts:
    return _presentation(b, node, EdgeKind.COVER)


def _dialog(b: _Builder, node: NormalizedNode, name: str) -> _Parts:
    props = node.props
    flag = b.presented(node)
    buttons, attached = b.buttons(node, props["actions"], "actions")
    params = _args(StringLit(props["title"]), isPresented=flag)
    visibility = props.get("title_visibility", "automatic")
    if visibility != "automatic":
        params += _args(titleVisibility=_case(visibility))
    message = b.text(node, "message")
    labeled = ()
    if message is not None:
        labeled = (Labeled("message", (Leaf("Text", message),)),)
    present = ModifierExpr(name, params, content=buttons, labeled=labeled)
    return _Parts(_trigger(props["trigger_label"], flag), attached=[present, *attached])


@component_rule("alert")
def _alert(b: _Builder, node: NormalizedNode) -> _Parts:
    return _dialog(b, node, "alert")


@component_rule("confirmationdialog")
def _confirmationdialog(b: _Builder, node: NormalizedNode) -> _Parts:
    return _dialog(b, node, "confirmationDialog")


@component_rule("menu")
def _menu(b: _Builder, node: NormalizedNode) -> _Parts:
    props = node.props
    items, attached = b.buttons(node, props["items"], "items")
    icon = StringLit(props["icon"]) if "icon" in props else None
    params = _args(StringLit(props["label"]), systemImage=icon)
    return _Parts(Container("Menu", items, params), attached=attached)


# =============================================================================
# Component rules: display, feedback, patterns
# =============================================================================


@component_rule("label")
def _label(b: _Builder, node: NormalizedNode) -> _Parts:
    props = node.props
    title = b.value(node, "title", StringLit(props["title"]))
    icon = b.value(node, "icon", StringLit(props["icon"]))
    parts = _Parts(Leaf("Label", title, _args(systemImage=icon)))
    if props["style"] != "automatic":
        parts.style.append(_mod("labelStyle", _case(props["style"])))
    return parts


@component_rule("progressview")
def _progressview(b: _Builder, node: NormalizedNode) -> _Parts:
    props = node.props
    label = b.text(node, "label")
    value = b.refs.get((node.id, "value"))
    if value is None and "value" in props:
        value = NumberLit(props["value"])
    params = ()
    if value is not None:
        params = _args(value=value, total=NumberLit(props["total"]))
    parts = _Parts(Leaf("ProgressView", label, params))
    if props["style"] != "automatic":
        parts.style.append(_mod("progressViewStyle", _case(props["style"])))
    return parts


@component_rule("emptystate")
def _emptystate(b: _Builder, node: NormalizedNode) -> _Parts:
    props = node.props
    title = b.value(node, "title", StringLit(props["title"]))
    label = Leaf("Label", title, _args(systemImage=StringLit(props["icon"])))
    labeled = []
    message = b.text(node, "message")
    if message is not None:
        labeled.append(Labeled("description", (Leaf("Text", message),)))
    actions = b.children(node)
    if actions:
        labeled.append(Labeled("actions", actions))
    return _Parts(Container("ContentUnavailableView", (label,), labeled=tuple(labeled)))


# =============================================================================
# Modifier rules
# =============================================================================


@modifier_rule("padding")
def _padding(b: _Builder, node: NormalizedNode, args: tuple) -> ModifierExpr:
    amount, edges = args
    values = []
    if edges is not None and edges != "all":
        values.append(_case(edges))
    if amount is not None:
        values.append(b.spacing(node, amount))
    return _mod("padding", *values)


@modifier_rule("background")
@modifier_rule("foreground_style")
@modifier_rule("tint")
def _color_modifier(b: _Builder, node: NormalizedNode, args: tuple) -> ModifierExpr:
    return _mod("", b.color(node, args[0]))


@modifier_rule("border")
def _border(b: _Builder, node: NormalizedNode, args: tuple) -> ModifierExpr:
    color, width = args
    line = NumberLit(width) if width is not None else None
    return _mod("", b.color(node, color), width=line)


@modifier_rule("corner_radius")
def _corner_radius(b: _Builder, node: NormalizedNode, args: tuple) -> ModifierExpr:
    return b.clip(node, args[0])


@modifier_rule("shadow")
def _shadow(b: _Builder, node: NormalizedNode, args: tuple) -> ModifierExpr:
    shadow = b.resolver.shadow(args[0], node.id)
    return _mod(
        "",
        color=b.resolver.shadow_color(args[0], node.id),
        radius=NumberLit(shadow.blur / 2),
        x=NumberLit(shadow.x),
        y=NumberLit(shadow.y),
    )


@modifier_rule("frame")
def _frame(b: _Builder, node: NormalizedNode, args: tuple) -> ModifierExpr:
    width, height = args
    if width is None and height is None:
        return _mod("", maxWidth=Identifier(".infinity"))
    return _mod(
        "",
        width=NumberLit(width) if width is not None else None,
        height=NumberLit(height) if height is not None else None,
    )


@modifier_rule("opacity")
@modifier_rule("line_limit")
def _number_modifier(b: _Builder, node: NormalizedNode, args: tuple) -> ModifierExpr:
    return _mod("", NumberLit(args[0]))


@modifier_rule("font")
def _font(b: _Builder, node: NormalizedNode, args: tuple) -> ModifierExpr:
    return _mod("", b.resolver.font_size(args[0], node.id))


@modifier_rule("font_weight")
def _font_weight(b: _Builder, node: NormalizedNode, args: tuple) -> ModifierExpr:
    return _mod("", _case(args[0]))


@modifier_rule("disabled")
def _disabled(b: _Builder, node: NormalizedNode, args: tuple) -> ModifierExpr:
    return _mod("", BoolLit(True if args[0] is None else args[0]))


@modifier_rule("navigation_title")
def _navigation_title(b: _Builder, node: NormalizedNode, args: tuple) -> ModifierExpr:
    return _mod("", StringLit(args[0]))


@modifier_rule("animation")
def _animation(b: _Builder, node: NormalizedNode, args: tuple) -> ModifierExpr:
    animation = b.resolver.motion(args[0], node.id)
    return _mod("", ActionBlock((Assign("$0.animation", animation),)))


# =============================================================================
# Entry points
# =============================================================================


def build(
    tree: NormalizedTree,
    tokens: DesignTokens,
    context: BindingContext | None = None,
    catalog: ComponentCatalog = CATALOG,
) -> BuildResult:
    """Lower a normalized tree into IR.

    Args:
        tree: Output of ``normalize``.
        tokens: Token set every styled value resolves through.
        context: Binding sources and screen names; defaults to an empty
            context (state bindings only).
        catalog: Catalog holding the modifier table.

    Returns:
        BuildResult: Body expression plus declarations and side tables.

    Raises:
        UnresolvedBindingSource: The first binding that does not resolve.
        UnknownModifier: A modifier has no lowering rule.
        TokenResolutionFailure: A slot name is outside its enum.
        InvariantError: A component type has no lowering rule.
    """
    context = context or BindingContext()
    analysis = analyze_bindings(tree, context)
    if analysis.issues:
        raise analysis.issues[0]
    builder = _Builder(tokens, context, analysis, catalog)
    body = builder.lower(tree.root)
    logger.debug(
        "Built '%s': %d state, %d edges", tree.root.id, len(builder.state), len(builder.edges)
    )
    return builder.result(body)


def build_model(model: DataModel) -> ModelFile:
    """Model declaration; persisted models get their own file."""
    properties = tuple(
        PropertyDecl(
            prop.name,
            swift_type(prop.type, prop.element_type) + ("?" if prop.is_optional else ""),
            Identifier("nil")
            if prop.is_optional and prop.default_value is None
            else typed_literal(prop.default_value, prop.type, prop.element_type),
            transient=model.is_persisted and not prop.is_persisted,
        )
        for prop in model.properties
    )
    imports = ("Foundation", "SwiftData") if model.is_persisted else ()
    return ModelFile(model.name, properties, model.is_persisted, imports)


def build_entry(
    app: AppDefinition,
    tokens: DesignTokens,
    symbols: Mapping[str, ScreenSymbol],
    routes: tuple[str, ...] = (),
) -> EntryFile:
    """The ``@main`` file: root view, route table and model registration."""
    route_table = tuple(
        RouteCase(symbols[target].route, target, symbols[target].view) for target in routes
    )

    def root_of(screen_id: str) -> UiExpr:
        symbol = symbols[screen_id]
        view = Leaf(symbol.view)
        if symbol.owns_stack:
            return view
        content = _attach(view, [route_destination()] if route_table else [])
        return Container("NavigationStack", (content,))

    if app.tab_bar is not None:
        root: UiExpr = Container(
            "TabView",
            tuple(
                tab_item(root_of(tab.screen), tab.title, tab.icon, tab.badge)
                for tab in app.tab_bar.tabs
            ),
        )
    else:
        root = root_of(app.entry_screen)

    config = app.config
    scene = [_mod("tint", TokenResolver(tokens).color("primary"))]
    if config.prefers_dark or not config.supports_light_mode:
        scene.append(_mod("preferredColorScheme", EnumCase("dark")))
    elif not config.supports_dark_mode:
        scene.append(_mod("preferredColorScheme", EnumCase("light")))

    models = tuple(build_model(model) for model in app.models if not model.is_persisted)
    persisted = tuple(model.name for model in app.models if model.is_persisted)
    imports = {"SwiftUI"}
    if persisted:
        imports.add("SwiftData")
    if models:
        imports.add("Foundation")
    return EntryFile(
        app_name=pascal_case(config.name) + "App",
        imports=tuple(sorted(imports)),
        root=root,
        routes=route_table,
        models=models,
        persisted_models=persisted,
        scene_modifiers=tuple(scene),
    )


__all__ = [
    "ENVIRONMENT_KEYS",
    "COMPONENT_RULES",
    "MODIFIER_RULES",
    "component_rule",
    "modifier_rule",
    "ScreenSymbol",
    "BindingContext",
    "BindingAnalysis",
    "BuildResult",
    "analyze_bindings",
    "check_bindings",
    "build",
    "build_model",
    "build_entry",
    "route_destination",
    "tab_item",
    "swift_type",
    "zero_value",
    "typed_literal",
    "json_literal",
]
