"""Tests for the codegen orchestrator."""

import pytest

from swiftship.catalog import CATALOG
from swiftship.config import GeneratorSettings
from swiftship.core.errors import (
    CrossReferenceError,
    InvalidProps,
    InvalidStructure,
    ResourceLimitExceeded,
)

from .lib import generate

SETTINGS = GeneratorSettings()


def _app(screens, entry=None, **extra):
    app = {
        "config": {"name": "Todo", "bundle_id": "com.example.todo", "display_name": "Todo"},
        "screens": screens,
        "entry_screen": entry or screens[0]["id"],
    }
    app.update(extra)
    return app


def _screen(screen_id, content, **extra):
    return {"id": screen_id, "name": screen_id.title(), "content": content, **extra}


def _text(node_id="t", content="Hi"):
    return {"id": node_id, "type": "text", "props": {"content": content}}


def _scenario_screen():
    return _screen(
        "detail",
        {
            "id": "root",
            "type": "vstack",
            "children": [
                {
                    "id": "headline",
                    "type": "text",
                    "props": {"content": "Placeholder"},
                    "bindings": [{"property": "content", "source": "state", "path": "title"}],
                },
                {
                    "id": "go",
                    "type": "button",
                    "props": {
                        "label": "Next",
                        "action": {"type": "navigate", "destination": "detail"},
                    },
                },
            ],
        },
    )


class TestScenarios:
    """End-to-end generation scenarios."""

    @pytest.mark.unit
    def test_single_screen_with_binding_and_navigation(self):
        result = generate(_app([_scenario_screen()]), SETTINGS)

        assert result.paths == ["Views/DetailView.swift", "TodoApp.swift"]
        assert result.warnings == ()
        view = result.get("Views/DetailView.swift").content
        assert "Text(title)" in view
        assert "Placeholder" not in view
        assert "@State private var title: String = \"\"" in view
        assert 'NavigationLink("Next", value: AppRoute.detail)' in view
        entry = result.get("TodoApp.swift").content
        assert "case .detail:\n            DetailView()" in entry
        assert [edge.target for edge in result.navigation] == ["detail"]

    @pytest.mark.unit
    def test_persisted_model_files_and_imports(self):
        models = [
            {
                "name": "TodoItem",
                "is_persisted": True,
                "properties": [{"name": "title", "type": "string"}],
            },
            {"name": "Draft", "properties": [{"name": "body", "type": "string"}]},
        ]
        result = generate(_app([_screen("home", _text())], models=models), SETTINGS)

        model_files = [path for path in result.paths if path.startswith("Models/")]
        assert model_files == ["Models/TodoItem.swift"]
        entry = result.get("TodoApp.swift").content
        assert "import SwiftData\n" in entry
        assert ".modelContainer(for: [TodoItem.self])" in entry
        assert "struct Draft: Identifiable {" in entry
        assert "@Model\nfinal class TodoItem {" in result.get("Models/TodoItem.swift").content

    @pytest.mark.unit
    def test_no_persistence_import_without_persisted_models(self):
        models = [{"name": "Draft", "properties": [{"name": "body", "type": "string"}]}]
        result = generate(_app([_screen("home", _text())], models=models), SETTINGS)

        assert not any(path.startswith("Models/") for path in result.paths)
        entry = result.get("TodoApp.swift").content
        assert "SwiftData" not in entry
        assert "import Foundation\n" in entry


class TestProperties:
    """Determinism, ordering and precedence."""

    @pytest.mark.unit
    def test_idempotent(self):
        app = _app([_scenario_screen()])
        assert generate(app, SETTINGS).files == generate(app, SETTINGS).files

    @pytest.mark.unit
    def test_parallel_matches_sequential(self):
        screens = [_screen(f"s{index}", _text()) for index in range(6)]
        tabs = [{"screen": s["id"], "title": s["name"], "icon": "circle"} for s in screens]
        app = _app(screens, tab_bar={"tabs": tabs})
        sequential = generate(app, SETTINGS)
        parallel = generate(app, GeneratorSettings(workers=4))
        assert parallel.files == sequential.files

    @pytest.mark.unit
    def test_modifier_order_in_output(self):
        node = {
            "id": "t",
            "type": "text",
            "modifiers": [
                {"name": "padding", "arguments": [4]},
                {"name": "background", "arguments": ["surface"]},
            ],
        }
        view = generate(_app([_screen("home", node)]), SETTINGS).files[0].content
        assert view.index(".padding(") < view.index(".background(")

    @pytest.mark.unit
    @pytest.mark.parametrize("type_tag", CATALOG.types())
    def test_every_type_generates(self, type_tag):
        meta = CATALOG.lookup(type_tag)
        node = {"id": "node", "type": type_tag, "props": dict(meta.sample_props)}
        if meta.constraints.requires_parent:
            node = {"id": "root", "type": "vstack", "children": [node]}
        screens = [_screen("home", node), _screen("detail", _text())]
        result = generate(_app(screens), SETTINGS)
        assert result.files[0].path == "Views/HomeView.swift"
        assert result.files[0].content.endswith("}\n")


class TestErrors:
    """Fatal failures."""

    @pytest.mark.unit
    def test_cross_references_aggregated(self):
        home = _screen(
            "home",
            {
                "id": "root",
                "type": "vstack",
                "children": [
                    {
                        "id": "link",
                        "type": "navigationlink",
                        "props": {"destination": "ghost"},
                    },
                    {
                        "id": "bad",
                        "type": "text",
                        "bindings": [
                            {"property": "content", "source": "parameter", "path": "missing"}
                        ],
                    },
                ],
            },
        )
        tabs = [
            {"screen": "home", "title": "Home", "icon": "house"},
            {"screen": "nowhere", "title": "Lost", "icon": "questionmark"},
        ]
        with pytest.raises(CrossReferenceError) as info:
            generate(_app([home], entry="start", tab_bar={"tabs": tabs}), SETTINGS)

        assert info.value.references == ["start", "nowhere", "ghost", "missing"]
        kinds = [issue.kind for issue in info.value.issues]
        assert kinds == ["entry_screen", "tab", "push", "binding"]

    @pytest.mark.unit
    def test_schema_error_names_screen(self):
        node = {"id": "s", "type": "slider", "props": {"min_value": 5, "max_value": 1}}
        with pytest.raises(InvalidProps) as info:
            generate(_app([_screen("prefs", node)]), SETTINGS)
        assert info.value.screen_id == "prefs"
        assert str(info.value).startswith("screen 'prefs': ")

    @pytest.mark.unit
    def test_resource_limit(self):
        node = _text()
        for level in range(5):
            node = {"id": f"v{level}", "type": "vstack", "children": [node]}
        with pytest.raises(ResourceLimitExceeded):
            generate(_app([_screen("home", node)]), GeneratorSettings(max_tree_depth=4))

    @pytest.mark.unit
    def test_malformed_definition(self):
        app = _app([_screen("home", _text())])
        del app["entry_screen"]
        with pytest.raises(InvalidStructure, match="entry_screen"):
            generate(app, SETTINGS)

    @pytest.mark.unit
    def test_keyword_state_binding_rejected(self):
        node = _text()
        node["bindings"] = [{"property": "content", "source": "state", "path": "default"}]
        with pytest.raises(InvalidProps, match="reserved Swift keyword") as info:
            generate(_app([_screen("home", node)]), SETTINGS)
        assert info.value.screen_id == "home"

    @pytest.mark.unit
    def test_keyword_parameter_and_model_property_rejected(self):
        screen = _screen("home", _text(), parameters=[{"name": "in"}])
        with pytest.raises(InvalidStructure, match="reserved Swift keyword"):
            generate(_app([screen]), SETTINGS)
        models = [{"name": "Note", "properties": [{"name": "return", "type": "string"}]}]
        with pytest.raises(InvalidStructure, match="reserved Swift keyword"):
            generate(_app([_screen("home", _text())], models=models), SETTINGS)


class TestWarnings:
    """Non-fatal findings."""

    @pytest.mark.unit
    def test_unused_model_and_unreachable_screen(self):
        screens = [_screen("home", _text()), _screen("orphan", _text())]
        models = [{"name": "Note"}]
        result = generate(_app(screens, models=models), SETTINGS)
        assert "Data model 'Note' is not used by any screen" in result.warnings
        assert "Screen 'orphan' is unreachable from the entry screen" in result.warnings
        assert len(result.files) == 3

    @pytest.mark.unit
    def test_depth_warning(self):
        node = _text()
        for level in range(4):
            node = {"id": f"v{level}", "type": "vstack", "children": [node]}
        result = generate(
            _app([_screen("home", node)]), GeneratorSettings(depth_warning=3)
        )
        assert any("nests 5 levels deep" in warning for warning in result.warnings)

    @pytest.mark.unit
    def test_nested_navigation_stack(self):
        node = {
            "id": "root",
            "type": "vstack",
            "children": [{"id": "nav", "type": "navigationstack", "children": [_text()]}],
        }
        result = generate(_app([_screen("home", node)]), SETTINGS)
        assert any("'nav' is nested" in warning for warning in result.warnings)

    @pytest.mark.unit
    def test_root_navigation_stack_is_not_nested(self):
        node = {"id": "nav", "type": "navigationstack", "children": [_text()]}
        result = generate(_app([_screen("home", node)]), SETTINGS)
        assert result.warnings == ()
        assert "NavigationStack {\n            HomeView()" not in result.files[-1].content

    @pytest.mark.unit
    def test_duplicate_deep_links(self):
        screens = [
            _screen("home", _text(), path="/home"),
            _screen("copy", _text(), path="/home"),
        ]
        tabs = [{"screen": s["id"], "title": s["name"], "icon": "circle"} for s in screens]
        result = generate(_app(screens, tab_bar={"tabs": tabs}), SETTINGS)
        assert result.warnings == (
            "Deep link path '/home' is used by both 'home' and 'copy'",
        )
