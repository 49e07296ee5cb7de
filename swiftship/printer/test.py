"""Unit tests for the Swift printer."""

import pytest

from swiftship.core.errors import UnrenderableExpression
from swiftship.definition import BindingSource
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
    NumberLit,
    ParameterDecl,
    PropertyDecl,
    RangeLit,
    RouteCase,
    RouteRef,
    StateDecl,
    StringLit,
    ViewFile,
)

from .lib import (
    SwiftPrinter,
    print_entry_file,
    print_expr,
    print_model_file,
    print_view_file,
    swift_string,
)


@pytest.fixture
def printer():
    return SwiftPrinter()


class TestStrings:
    """Tests for string literal escaping."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("plain", '"plain"'),
            ('say "hi"', '"say \\"hi\\""'),
            ("a\\b", '"a\\\\b"'),
            ("line\nbreak", '"line\\nbreak"'),
            ("bell\x07", '"bell\\u{7}"'),
            ("\\(injected)", '"\\\\(injected)"'),
            ("café", '"café"'),
        ],
    )
    def test_escape(self, text, expected):
        assert swift_string(text) == expected


class TestValues:
    """Tests for value expressions."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "expr,expected",
        [
            (NumberLit(16.0), "16"),
            (NumberLit(0.5), "0.5"),
            (BoolLit(False), "false"),
            (EnumCase("insetGrouped"), ".insetGrouped"),
            (RangeLit(NumberLit(0), NumberLit(10)), "0...10"),
            (ArrayLit((EnumCase("date"), EnumCase("time"))), "[.date, .time]"),
            (RouteRef("detail", "detail"), "AppRoute.detail"),
            (Call("Capsule"), "Capsule()"),
            (ActionBlock(), "{}"),
            (ActionBlock((Assign("isShown", BoolLit(True)),)), "{ isShown = true }"),
        ],
    )
    def test_value(self, printer, expr, expected):
        assert printer.value(expr) == expected

    @pytest.mark.unit
    def test_bindings(self, printer):
        state = BindingSource.STATE
        assert printer.value(BindingRef(state, "name", two_way=True)) == "$name"
        assert printer.value(BindingRef(state, "count", interpolate=True)) == '"\\(count)"'
        assert printer.value(BindingRef(BindingSource.PARAMETER, "title")) == "title"

    @pytest.mark.unit
    def test_unknown_shape_raises(self, printer):
        with pytest.raises(UnrenderableExpression):
            printer.value(object())
        with pytest.raises(UnrenderableExpression):
            printer.view("Text")
        with pytest.raises(UnrenderableExpression, match="No print rule for str"):
            printer.statement("x = 1")


class TestViews:
    """Tests for view expressions."""

    @pytest.mark.unit
    def test_leaf_with_trailing_closure(self):
        button = Leaf(
            "Button",
            StringLit("Go"),
            (Argument(None, ActionBlock((Assign("isOpen", BoolLit(True)),))),),
        )
        assert print_expr(button) == 'Button("Go") {\n    isOpen = true\n}\n'

    @pytest.mark.unit
    def test_empty_closure_stays_inline(self):
        button = Leaf("Button", StringLit("Go"), (Argument(None, ActionBlock()),))
        assert print_expr(button) == 'Button("Go") {}\n'

    @pytest.mark.unit
    def test_container_and_modifiers(self):
        expr = Modified(
            Container(
                "VStack",
                (Leaf("Text", StringLit("A")), Leaf("Divider")),
                (Argument("spacing", NumberLit(8)),),
            ),
            (ModifierExpr("padding"),),
        )
        assert print_expr(expr) == (
            "VStack(spacing: 8) {\n"
            '    Text("A")\n'
            "    Divider()\n"
            "}\n"
            "    .padding()\n"
        )

    @pytest.mark.unit
    def test_labeled_closures(self):
        expr = Container(
            "Section",
            (Leaf("Text", StringLit("Row")),),
            labeled=(Labeled("header", (Leaf("Text", StringLit("Head")),)),),
        )
        assert print_expr(expr) == (
            "Section {\n"
            '    Text("Row")\n'
            "} header: {\n"
            '    Text("Head")\n'
            "}\n"
        )

    @pytest.mark.unit
    def test_modifier_with_parameter(self, printer):
        modifier = ModifierExpr(
            "navigationDestination",
            (Argument("for", Identifier("AppRoute.self")),),
            content=(Leaf("RouteDestination", None, (Argument("route", EnumCase("x")),)),),
            parameter="route",
        )
        lines = printer.modifier(modifier, 0)
        assert lines[0] == ".navigationDestination(for: AppRoute.self) { route in"
        assert lines[-1] == "}"

    @pytest.mark.unit
    def test_conditional(self):
        expr = Conditional(
            BindingRef(BindingSource.STATE, "shown"), Leaf("Text", StringLit("Hi"))
        )
        assert print_expr(expr) == 'if shown {\n    Text("Hi")\n}\n'


class TestFiles:
    """Tests for whole-file rendering."""

    @pytest.mark.unit
    def test_view_file(self):
        view = ViewFile(
            name="HomeView",
            imports=("SwiftUI",),
            parameters=(ParameterDecl("title", "String", StringLit("")),),
            environment=(EnvironmentDecl("dismiss", "dismiss"),),
            state=(StateDecl("isOn", "Bool", BoolLit(False)),),
            body=Leaf("Text", StringLit("Hi")),
            helpers=(HelperFunc("save", (("id", NumberLit(1)),)),),
        )
        source = print_view_file(view)
        assert source.startswith("import SwiftUI\n\nstruct HomeView: View {\n")
        assert '    var title: String = ""\n' in source
        assert "    @Environment(\\.dismiss) private var dismiss\n" in source
        assert "    @State private var isOn: Bool = false\n" in source
        assert '        Text("Hi")\n' in source
        assert "    private func save() {\n        // id: 1\n    }\n" in source
        assert source.endswith("#Preview {\n    HomeView()\n}\n")

    @pytest.mark.unit
    def test_render_is_deterministic(self):
        view = ViewFile("AView", ("SwiftUI",), (), (), (), Leaf("Divider"))
        assert print_view_file(view) == print_view_file(view)

    @pytest.mark.unit
    def test_persisted_model(self):
        model = ModelFile(
            "TodoItem",
            (
                PropertyDecl("title", "String", StringLit("")),
                PropertyDecl("draft", "Bool", BoolLit(False), transient=True),
            ),
            persisted=True,
            imports=("Foundation", "SwiftData"),
        )
        source = print_model_file(model)
        assert source.startswith("import Foundation\nimport SwiftData\n\n@Model\n")
        assert "final class TodoItem {\n" in source
        assert "    @Transient var draft: Bool = false\n" in source
        assert '    init(title: String = "") {\n        self.title = title\n    }\n' in source

    @pytest.mark.unit
    def test_struct_model_gets_identity(self, printer):
        model = ModelFile("Tag", (PropertyDecl("name", "String", StringLit("")),), False)
        lines = printer.model_lines(model)
        assert lines[:2] == ["struct Tag: Identifiable {", "    var id = UUID()"]

    @pytest.mark.unit
    def test_entry_file(self):
        entry = EntryFile(
            app_name="TodoApp",
            imports=("SwiftUI", "SwiftData"),
            root=Container("NavigationStack", (Leaf("HomeView"),)),
            routes=(RouteCase("detail", "detail", "DetailView"),),
            persisted_models=("TodoItem",),
            scene_modifiers=(
                ModifierExpr("preferredColorScheme", (Argument(None, EnumCase("dark")),)),
            ),
        )
        source = print_entry_file(entry)
        assert source.startswith("import SwiftData\nimport SwiftUI\n\n@main\n")
        scene = "            RootView()\n                .preferredColorScheme(.dark)\n"
        assert scene in source
        assert "        .modelContainer(for: [TodoItem.self])\n" in source
        assert "enum AppRoute: Hashable {\n    case detail\n}\n" in source
        assert "        case .detail:\n            DetailView()\n" in source
