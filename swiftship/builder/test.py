"""Unit tests for the AST builder."""

import pytest

from swiftship.catalog import CATALOG, ComponentCategory, ComponentMeta, Props
from swiftship.core.errors import InvariantError, UnresolvedBindingSource
from swiftship.definition import (
    AppDefinition,
    BindingSource,
    DataModel,
    ModelProperty,
    ScreenParameter,
)
from swiftship.ir import (
    ActionBlock,
    Assign,
    BindingRef,
    BoolLit,
    Call,
    Conditional,
    Container,
    EdgeKind,
    EnumCase,
    Identifier,
    Leaf,
    Modified,
    NumberLit,
    RangeLit,
    RouteRef,
    StringLit,
)
from swiftship.normalizer import normalize
from swiftship.tokens import TokenValue, generate_design_tokens

from .lib import (
    COMPONENT_RULES,
    BindingContext,
    ScreenSymbol,
    analyze_bindings,
    build,
    build_entry,
    build_model,
    check_bindings,
    swift_type,
    typed_literal,
)


@pytest.fixture(scope="module")
def tokens():
    return generate_design_tokens("#007AFF")


def _build(raw, tokens, context=None):
    return build(normalize(raw), tokens, context)


def _modifier_names(expr):
    assert isinstance(expr, Modified)
    return [modifier.name for modifier in expr.modifiers]


class TestRules:
    """Tests for the lowering tables."""

    @pytest.mark.unit
    def test_every_catalog_type_has_a_rule_or_is_hoisted(self):
        missing = set(CATALOG.types()) - set(COMPONENT_RULES) - {"toolbar"}
        assert missing == set()

    @pytest.mark.unit
    def test_missing_rule_is_invariant_error(self, tokens):
        catalog = CATALOG.extend(
            ComponentMeta(
                type="badge",
                name="Badge",
                category=ComponentCategory.DATA_DISPLAY,
                description="Unlowered type",
                icon="tag",
                props_schema=Props,
            )
        )
        tree = normalize({"id": "root", "type": "badge"}, catalog)
        with pytest.raises(InvariantError, match="No lowering rule"):
            build(tree, tokens, catalog=catalog)


class TestPrimitives:
    """Tests for leaf lowering."""

    @pytest.mark.unit
    def test_text_literal(self, tokens):
        result = _build({"id": "t", "type": "text", "props": {"content": "Hi"}}, tokens)
        assert result.body == Leaf("Text", StringLit("Hi"))
        assert result.state == ()

    @pytest.mark.unit
    def test_text_styles_resolve_tokens(self, tokens):
        result = _build(
            {
                "id": "t",
                "type": "text",
                "props": {"content": "Hi", "color": "primary", "weight": "bold"},
            },
            tokens,
        )
        assert _modifier_names(result.body) == ["fontWeight", "foregroundStyle"]
        color = result.body.modifiers[1].arguments[0].value
        assert isinstance(color, TokenValue)
        assert color.slot == "primary"

    @pytest.mark.unit
    def test_shadow_uses_half_blur(self, tokens):
        result = _build(
            {
                "id": "t",
                "type": "text",
                "modifiers": [{"name": "shadow", "arguments": ["lg"]}],
            },
            tokens,
        )
        shadow = result.body.modifiers[0]
        assert [arg.label for arg in shadow.arguments] == ["color", "radius", "x", "y"]
        blur = tokens.shadows.get("lg").blur
        assert shadow.arguments[1].value == NumberLit(blur / 2)

    @pytest.mark.unit
    def test_image_url(self, tokens):
        result = _build(
            {
                "id": "img",
                "type": "image",
                "props": {"source": "url", "url": "https://example.com/a.png"},
            },
            tokens,
        )
        assert result.body.kind == "AsyncImage"

    @pytest.mark.unit
    def test_system_image_is_resizable(self, tokens):
        result = _build(
            {"id": "img", "type": "image", "props": {"name": "star"}}, tokens
        )
        assert _modifier_names(result.body)[:2] == ["resizable", "aspectRatio"]


class TestModifiers:
    """Tests for modifier lowering and ordering."""

    @pytest.mark.unit
    def test_order_preserved(self, tokens):
        result = _build(
            {
                "id": "t",
                "type": "text",
                "props": {"content": "Hi"},
                "modifiers": [
                    {"name": "padding", "arguments": [4]},
                    {"name": "background", "arguments": ["surface"]},
                    {"name": "corner_radius", "arguments": ["md"]},
                ],
            },
            tokens,
        )
        assert _modifier_names(result.body) == ["padding", "background", "clipShape"]

    @pytest.mark.unit
    def test_swapped_order_differs(self, tokens):
        def body(order):
            raw = {
                "id": "t",
                "type": "text",
                "modifiers": [
                    {"name": name, "arguments": args} for name, args in order
                ],
            }
            return _build(raw, tokens).body

        first = body([("padding", [4]), ("background", ["surface"])])
        second = body([("background", ["surface"]), ("padding", [4])])
        assert first != second

    @pytest.mark.unit
    def test_full_radius_is_capsule(self, tokens):
        result = _build(
            {
                "id": "t",
                "type": "text",
                "modifiers": [{"name": "corner_radius", "arguments": ["full"]}],
            },
            tokens,
        )
        assert result.body.modifiers[0].arguments[0].value == Call("Capsule")

    @pytest.mark.unit
    def test_frame_without_size_fills_width(self, tokens):
        result = _build(
            {"id": "t", "type": "text", "modifiers": [{"name": "frame"}]}, tokens
        )
        argument = result.body.modifiers[0].arguments[0]
        assert argument.label == "maxWidth"
        assert argument.value == Identifier(".infinity")

    @pytest.mark.unit
    def test_animation_uses_transaction(self, tokens):
        result = _build(
            {
                "id": "t",
                "type": "text",
                "modifiers": [{"name": "animation", "arguments": ["snappy"]}],
            },
            tokens,
        )
        modifier = result.body.modifiers[0]
        assert modifier.name == "transaction"
        block = modifier.arguments[0].value
        assert isinstance(block, ActionBlock)
        assert isinstance(block.statements[0], Assign)


class TestBindings:
    """Tests for binding resolution."""

    @pytest.mark.unit
    def test_state_type_inferred_from_toggle(self, tokens):
        result = _build(
            {
                "id": "t",
                "type": "toggle",
                "bindings": [{"property": "is_on", "source": "state", "path": "enabled"}],
            },
            tokens,
        )
        (decl,) = result.state
        assert decl.name == "enabled"
        assert decl.swift_type == "Bool"
        assert decl.initial == BoolLit(False)
        assert result.body.state_ref == BindingRef(BindingSource.STATE, "enabled", True)

    @pytest.mark.unit
    def test_display_binding_interpolates(self, tokens):
        result = _build(
            {
                "id": "root",
                "type": "vstack",
                "children": [
                    {
                        "id": "s",
                        "type": "stepper",
                        "bindings": [
                            {"property": "value", "source": "state", "path": "count"}
                        ],
                    },
                    {
                        "id": "t",
                        "type": "text",
                        "bindings": [
                            {"property": "content", "source": "state", "path": "count"}
                        ],
                    },
                ],
            },
            tokens,
        )
        assert result.state[0].swift_type == "Int"
        text = result.body.children[1]
        assert text.value == BindingRef(BindingSource.STATE, "count", interpolate=True)

    @pytest.mark.unit
    def test_conflicting_state_types(self, tokens):
        raw = {
            "id": "root",
            "type": "vstack",
            "children": [
                {
                    "id": "a",
                    "type": "toggle",
                    "bindings": [{"property": "is_on", "source": "state", "path": "x"}],
                },
                {
                    "id": "b",
                    "type": "textfield",
                    "bindings": [{"property": "text", "source": "state", "path": "x"}],
                },
            ],
        }
        issues = check_bindings(normalize(raw))
        assert [issue.node_id for issue in issues] == ["b"]

    @pytest.mark.unit
    def test_unknown_parameter(self, tokens):
        raw = {
            "id": "t",
            "type": "text",
            "bindings": [{"property": "content", "source": "parameter", "path": "title"}],
        }
        with pytest.raises(UnresolvedBindingSource, match="not a parameter"):
            _build(raw, tokens)

    @pytest.mark.unit
    def test_parameter_binding(self, tokens):
        raw = {
            "id": "t",
            "type": "text",
            "bindings": [{"property": "content", "source": "parameter", "path": "title"}],
        }
        context = BindingContext(parameters={"title": ScreenParameter(name="title")})
        result = _build(raw, tokens, context)
        assert result.body.value == BindingRef(BindingSource.PARAMETER, "title")
        assert result.parameters[0].swift_type == "String"

    @pytest.mark.unit
    def test_two_way_parameter_rejected(self, tokens):
        raw = {
            "id": "t",
            "type": "textfield",
            "bindings": [{"property": "text", "source": "parameter", "path": "title"}],
        }
        context = BindingContext(parameters={"title": ScreenParameter(name="title")})
        with pytest.raises(UnresolvedBindingSource, match="read-only"):
            _build(raw, tokens, context)

    @pytest.mark.unit
    def test_environment_binding(self, tokens):
        raw = {
            "id": "t",
            "type": "text",
            "bindings": [
                {"property": "content", "source": "environment", "path": "locale"}
            ],
        }
        result = _build(raw, tokens)
        assert [decl.key for decl in result.environment] == ["locale"]

    @pytest.mark.unit
    def test_unknown_environment_key(self, tokens):
        raw = {
            "id": "t",
            "type": "text",
            "bindings": [
                {"property": "content", "source": "environment", "path": "weather"}
            ],
        }
        assert len(check_bindings(normalize(raw))) == 1

    @pytest.mark.unit
    def test_model_member_binding(self, tokens):
        model = DataModel(
            name="TodoItem",
            properties=[ModelProperty(name="title", type="string")],
        )
        raw = {
            "id": "f",
            "type": "textfield",
            "bindings": [
                {"property": "text", "source": "state", "path": "todoItem.title"}
            ],
        }
        context = BindingContext(models={"todoItem": model})
        result = _build(raw, tokens, context)
        assert result.state[0].initial == Call("TodoItem")
        assert result.body.state_ref.path == "todoItem.title"

    @pytest.mark.unit
    def test_missing_model_member(self, tokens):
        model = DataModel(name="TodoItem")
        raw = {
            "id": "f",
            "type": "text",
            "bindings": [
                {"property": "content", "source": "state", "path": "todoItem.title"}
            ],
        }
        context = BindingContext(models={"todoItem": model})
        analysis = analyze_bindings(normalize(raw), context)
        assert "has no property" in analysis.issues[0].reason

    @pytest.mark.unit
    def test_visibility_wraps_in_conditional(self, tokens):
        raw = {
            "id": "t",
            "type": "text",
            "bindings": [{"property": "is_visible", "source": "state", "path": "shown"}],
            "modifiers": [{"name": "padding"}],
        }
        result = _build(raw, tokens)
        assert isinstance(result.body, Conditional)
        assert isinstance(result.body.then, Modified)
        assert result.state[0].swift_type == "Bool"

    @pytest.mark.unit
    def test_unbound_control_warns(self, tokens):
        result = _build({"id": "t", "type": "toggle"}, tokens)
        value = result.body.arguments[0].value
        assert isinstance(value, Call)
        assert value.callee == ".constant"
        assert len(result.warnings) == 1


class TestNavigation:
    """Tests for navigation, presentation and actions."""

    @pytest.mark.unit
    def test_navigate_button_is_link(self, tokens):
        raw = {
            "id": "go",
            "type": "button",
            "props": {
                "label": "Open",
                "action": {"type": "navigate", "destination": "detail"},
            },
        }
        result = _build(raw, tokens, BindingContext(screen_id="home"))
        link = result.body.inner
        assert link.kind == "NavigationLink"
        assert link.arguments[0].value == RouteRef("detail", "detail")
        assert result.edges[0].kind == EdgeKind.PUSH
        assert result.edges[0].source == "home"

    @pytest.mark.unit
    def test_sheet_action_declares_flag(self, tokens):
        raw = {
            "id": "add",
            "type": "button",
            "props": {"action": {"type": "sheet", "destination": "editor"}},
        }
        result = _build(raw, tokens)
        assert result.state[0].name == "isAddPresented"
        assert "sheet" in _modifier_names(result.body)
        assert result.edges[0].kind == EdgeKind.SHEET

    @pytest.mark.unit
    def test_dismiss_declares_environment(self, tokens):
        raw = {"id": "close", "type": "button", "props": {"action": {"type": "dismiss"}}}
        result = _build(raw, tokens)
        assert [decl.key for decl in result.environment] == ["dismiss"]

    @pytest.mark.unit
    def test_custom_action_helper(self, tokens):
        raw = {
            "id": "save",
            "type": "button",
            "props": {
                "action": {
                    "type": "custom",
                    "name": "save_item",
                    "parameters": {"b": 1, "a": "x"},
                }
            },
        }
        result = _build(raw, tokens)
        (helper,) = result.helpers
        assert helper.name == "saveItem"
        assert [key for key, _ in helper.parameters] == ["a", "b"]

    @pytest.mark.unit
    def test_custom_helper_does_not_collide_with_state(self, tokens):
        raw = {
            "id": "root",
            "type": "vstack",
            "children": [
                {
                    "id": "t",
                    "type": "toggle",
                    "bindings": [
                        {"property": "is_on", "source": "state", "path": "refresh"}
                    ],
                },
                {
                    "id": "a",
                    "type": "button",
                    "props": {"action": {"type": "custom", "name": "refresh"}},
                },
                {
                    "id": "b",
                    "type": "button",
                    "props": {"action": {"type": "custom", "name": "refresh"}},
                },
            ],
        }
        result = _build(raw, tokens)
        assert [decl.name for decl in result.state] == ["refresh"]
        assert [helper.name for helper in result.helpers] == ["refresh2"]

    @pytest.mark.unit
    def test_custom_helper_does_not_collide_with_environment(self, tokens):
        raw = {
            "id": "root",
            "type": "vstack",
            "children": [
                {"id": "close", "type": "button", "props": {"action": {"type": "dismiss"}}},
                {
                    "id": "b",
                    "type": "button",
                    "props": {"action": {"type": "custom", "name": "dismiss"}},
                },
            ],
        }
        result = _build(raw, tokens)
        assert [decl.key for decl in result.environment] == ["dismiss"]
        assert [helper.name for helper in result.helpers] == ["dismiss2"]

    @pytest.mark.unit
    def test_navigation_stack_feature(self, tokens):
        raw = {
            "id": "nav",
            "type": "navigationstack",
            "props": {"title": "Home"},
            "children": [{"id": "t", "type": "text"}],
        }
        result = _build(raw, tokens)
        assert "navigation_stack" in result.features
        content = result.body.children[0]
        assert _modifier_names(content) == ["navigationTitle", "navigationDestination"]

    @pytest.mark.unit
    def test_toolbar_hoisted(self, tokens):
        raw = {
            "id": "root",
            "type": "vstack",
            "children": [
                {"id": "t", "type": "text"},
                {
                    "id": "bar",
                    "type": "toolbar",
                    "children": [{"id": "b", "type": "button"}],
                },
            ],
        }
        result = _build(raw, tokens)
        assert len(result.body.inner.children) == 1
        assert _modifier_names(result.body) == ["toolbar"]
        group = result.body.modifiers[0].content[0]
        assert group.kind == "ToolbarItemGroup"

    @pytest.mark.unit
    def test_toolbar_inside_navigation_stack(self, tokens):
        raw = {
            "id": "nav",
            "type": "navigationstack",
            "children": [
                {"id": "t", "type": "text"},
                {
                    "id": "bar",
                    "type": "toolbar",
                    "children": [{"id": "b", "type": "button"}],
                },
            ],
        }
        result = _build(raw, tokens)
        assert isinstance(result.body, Container)
        assert result.body.kind == "NavigationStack"
        (content,) = result.body.children
        assert "toolbar" in _modifier_names(content)
        assert content.inner == Leaf("Text", StringLit("Hello, World!"))

    @pytest.mark.unit
    def test_alert_with_bound_flag(self, tokens):
        raw = {
            "id": "confirm",
            "type": "alert",
            "props": {
                "title": "Delete?",
                "actions": [{"label": "Delete", "role": "destructive"}],
            },
            "bindings": [
                {"property": "is_presented", "source": "state", "path": "showDelete"}
            ],
        }
        result = _build(raw, tokens)
        assert [decl.name for decl in result.state] == ["showDelete"]
        alert = result.body.modifiers[-1]
        assert alert.name == "alert"
        assert alert.arguments[1].value.two_way

    @pytest.mark.unit
    def test_slider_range(self, tokens):
        result = _build({"id": "s", "type": "slider", "props": {"max_value": 10}}, tokens)
        bounds = result.body.arguments[1]
        assert bounds.label == "in"
        assert bounds.value == RangeLit(NumberLit(0), NumberLit(10))


class TestFiles:
    """Tests for model and entry declarations."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "kind,element,expected",
        [
            ("string", None, "String"),
            ("array", "int", "[Int]"),
            ("optional", "date", "Date?"),
        ],
    )
    def test_swift_type(self, kind, element, expected):
        assert swift_type(kind, element) == expected

    @pytest.mark.unit
    def test_typed_literal_date(self):
        assert typed_literal(0, "date").callee == "Date"
        assert typed_literal(None, "date") == EnumCase("now")

    @pytest.mark.unit
    def test_transient_property(self):
        model = DataModel(
            name="Note",
            is_persisted=True,
            properties=[
                ModelProperty(name="body", type="string"),
                ModelProperty(name="draft", type="bool", is_persisted=False),
            ],
        )
        decl = build_model(model)
        assert [prop.transient for prop in decl.properties] == [False, True]
        assert decl.imports == ("Foundation", "SwiftData")

    @pytest.mark.unit
    def test_entry_with_tabs_and_models(self, tokens):
        app = AppDefinition.model_validate(
            {
                "config": {"name": "Todo", "bundle_id": "a.b", "display_name": "Todo"},
                "screens": [
                    {"id": "list", "name": "List", "content": {"id": "r", "type": "text"}},
                    {
                        "id": "prefs",
                        "name": "Prefs",
                        "content": {"id": "r", "type": "text"},
                    },
                ],
                "models": [{"name": "Item", "is_persisted": True}],
                "entry_screen": "list",
                "tab_bar": {
                    "tabs": [
                        {"screen": "list", "title": "List", "icon": "list.bullet"},
                        {"screen": "prefs", "title": "Prefs", "icon": "gear"},
                    ]
                },
            }
        )
        symbols = {
            screen.id: ScreenSymbol.derive(screen.id, screen.name) for screen in app.screens
        }
        entry = build_entry(app, tokens, symbols)
        assert entry.app_name == "TodoApp"
        assert entry.imports == ("SwiftData", "SwiftUI")
        assert entry.persisted_models == ("Item",)
        assert isinstance(entry.root, Container)
        assert entry.root.kind == "TabView"
        assert len(entry.root.children) == 2
