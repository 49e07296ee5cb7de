"""Tests for the generate, catalog and tokens CLI commands."""

import json
import subprocess
import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[2]


def _run(*args: str) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, ".", *args],
        capture_output=True,
        text=True,
        cwd=REPO_ROOT,
        timeout=60,
    )


@pytest.fixture
def app_file(tmp_path, todo_app) -> Path:
    path = tmp_path / "app.json"
    path.write_text(json.dumps(todo_app), encoding="utf-8")
    return path


@pytest.mark.integration
class TestGenerateCommand:
    """python . generate"""

    def test_writes_files(self, app_file, tmp_path):
        out = tmp_path / "out"
        result = _run("generate", str(app_file), "-o", str(out))

        assert result.returncode == 0, result.stderr
        assert (out / "TodoApp.swift").is_file()
        assert (out / "Views" / "TodoListView.swift").is_file()
        assert (out / "Models" / "TodoItem.swift").is_file()

    def test_dry_run_writes_nothing(self, app_file, tmp_path):
        out = tmp_path / "out"
        result = _run("generate", str(app_file), "-o", str(out), "--dry-run")

        assert result.returncode == 0, result.stderr
        assert "// Views/TodoListView.swift" in result.stdout
        assert not out.exists()

    def test_json_errors(self, tmp_path, make_app):
        path = tmp_path / "broken.json"
        path.write_text(json.dumps(make_app(entry_screen="missing")), encoding="utf-8")
        result = _run("generate", str(path), "--dry-run", "--json-errors")

        assert result.returncode == 1
        error = json.loads(result.stdout)
        assert error["error"] == "CrossReferenceError"
        assert error["issues"][0]["reference"] == "missing"

    def test_missing_file(self, tmp_path):
        result = _run("generate", str(tmp_path / "nope.json"))
        assert result.returncode == 1


@pytest.mark.integration
class TestInspectionCommands:
    """python . catalog / python . tokens"""

    def test_catalog_json(self):
        result = _run("catalog", "--json")

        assert result.returncode == 0, result.stderr
        types = {entry["type"] for entry in json.loads(result.stdout)}
        assert {"text", "button", "navigationstack", "emptystate"} <= types

    def test_catalog_category(self):
        result = _run("catalog", "--category", "input")

        assert result.returncode == 0, result.stderr
        assert "toggle" in result.stdout
        assert "vstack" not in result.stdout

    def test_tokens_json(self):
        result = _run("tokens", "--primary", "#FF3B30", "--dark", "--json")

        assert result.returncode == 0, result.stderr
        tokens = json.loads(result.stdout)
        assert tokens["is_dark"] is True
        assert "primary" in tokens["colors"]

    def test_tokens_invalid_colour(self):
        result = _run("tokens", "--primary", "not-a-colour")
        assert result.returncode == 1
