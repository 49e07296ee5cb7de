"""End-to-end generation of a multi-screen app definition."""

import pytest

from swiftship.codegen import generate
from swiftship.config import GeneratorSettings
from swiftship.core.errors import CrossReferenceError


@pytest.mark.integration
class TestTodoApp:
    """The shared todo app fixture through the full pipeline."""

    def test_file_layout(self, todo_app, settings):
        result = generate(todo_app, settings)

        assert result.paths == [
            "Views/TodoListView.swift",
            "Views/DetailView.swift",
            "Views/ComposeView.swift",
            "Views/SettingsView.swift",
            "Models/TodoItem.swift",
            "TodoApp.swift",
        ]
        assert result.warnings == ()

    def test_list_screen(self, todo_app, settings):
        view = generate(todo_app, settings).get("Views/TodoListView.swift").content

        assert view.startswith("import SwiftUI\n")
        assert "struct TodoListView: View {" in view
        assert '@State private var draft: String = ""' in view
        assert 'TextField("New todo", text: $draft)' in view
        assert 'NavigationLink("Details", value: AppRoute.detail)' in view
        assert ".sheet(isPresented: $isComposePresented)" in view
        assert "ComposeView()" in view
        assert "#Preview {\n    TodoListView()\n}" in view

    def test_detail_screen_binds_model(self, todo_app, settings):
        view = generate(todo_app, settings).get("Views/DetailView.swift").content

        assert "@State private var todoItem = TodoItem()" in view
        assert 'Toggle("Done", isOn: $todoItem.isDone)' in view
        assert "@Environment(\\.dismiss) private var dismiss" in view

    def test_custom_action_helper(self, todo_app, settings):
        view = generate(todo_app, settings).get("Views/ComposeView.swift").content

        assert "saveTodo()" in view
        assert "private func saveTodo() {" in view

    def test_entry_file(self, todo_app, settings):
        entry = generate(todo_app, settings).get("TodoApp.swift").content

        assert "@main\nstruct TodoApp: App {" in entry
        assert ".modelContainer(for: [TodoItem.self])" in entry
        assert "TabView {" in entry
        assert 'Label("Todos", systemImage: "checklist")' in entry
        assert "enum AppRoute: Hashable {\n    case detail\n}" in entry
        assert "case .detail:\n            DetailView()" in entry

    def test_model_file(self, todo_app, settings):
        model = generate(todo_app, settings).get("Models/TodoItem.swift").content

        assert "@Model\nfinal class TodoItem {" in model
        assert "var isDone: Bool" in model
        assert "var createdAt: Date" in model

    def test_navigation_graph(self, todo_app, settings):
        result = generate(todo_app, settings)

        edges = {(edge.source, edge.target, edge.kind.value) for edge in result.navigation}
        assert edges == {("list", "detail", "push"), ("list", "compose", "sheet")}

    def test_dark_scheme(self, make_app, settings):
        app = make_app(config={"prefers_dark": True, "supports_light_mode": False})
        entry = generate(app, settings).get("TodoApp.swift").content

        assert ".preferredColorScheme(.dark)" in entry

    def test_parallel_build_matches(self, todo_app, settings):
        sequential = generate(todo_app, settings)
        parallel = generate(todo_app, GeneratorSettings(workers=4))

        assert parallel.files == sequential.files


@pytest.mark.integration
class TestBrokenApp:
    """Reference failures across several screens surface together."""

    def test_every_dangling_reference_reported(self, make_app, settings):
        app = make_app(entry_screen="missing")
        app["screens"][0]["content"]["children"][2]["props"]["action"][
            "destination"
        ] = "nowhere"
        app["tab_bar"]["tabs"][1]["screen"] = "ghost"

        with pytest.raises(CrossReferenceError) as excinfo:
            generate(app, settings)

        assert excinfo.value.references == ["missing", "ghost", "nowhere"]
