"""Root pytest configuration and fixtures.

This module provides:
- Environment setup (loads .env)
- Shared generator settings
- Sample app definitions for end-to-end tests
"""

from __future__ import annotations

from typing import Any, Callable

import pytest
from dotenv import load_dotenv

from swiftship.config import GeneratorSettings

# Load environment variables from .env file
load_dotenv()


# =============================================================================
# Configuration Constants
# =============================================================================

DEFAULT_PRIMARY = "#007AFF"


# =============================================================================
# Generator Fixtures
# =============================================================================


@pytest.fixture
def settings() -> GeneratorSettings:
    """Generator settings with default limits and a single worker.

    Built directly rather than from the environment so a developer's
    ``.env`` cannot change test outcomes.
    """
    return GeneratorSettings()


# =============================================================================
# App Definition Fixtures
# =============================================================================


def _list_screen() -> dict[str, Any]:
    return {
        "id": "list",
        "name": "Todo List",
        "path": "/todos",
        "content": {
            "id": "root",
            "type": "vstack",
            "props": {"spacing": 4},
            "children": [
                {
                    "id": "title",
                    "type": "text",
                    "props": {"content": "Todos", "font": "title"},
                },
                {
                    "id": "new_title",
                    "type": "textfield",
                    "props": {"placeholder": "New todo"},
                    "bindings": [
                        {"property": "text", "source": "state", "path": "draft"}
                    ],
                },
                {
                    "id": "open_detail",
                    "type": "button",
                    "props": {
                        "label": "Details",
                        "action": {"type": "navigate", "destination": "detail"},
                    },
                },
                {
                    "id": "compose",
                    "type": "button",
                    "props": {
                        "label": "Compose",
                        "icon": "square.and.pencil",
                        "action": {"type": "sheet", "destination": "compose"},
                    },
                    "modifiers": [{"name": "padding", "arguments": [2]}],
                },
            ],
        },
    }


def _detail_screen() -> dict[str, Any]:
    return {
        "id": "detail",
        "name": "Detail",
        "content": {
            "id": "root",
            "type": "vstack",
            "children": [
                {
                    "id": "done",
                    "type": "toggle",
                    "props": {"label": "Done"},
                    "bindings": [
                        {"property": "is_on", "source": "state", "path": "todoItem.isDone"}
                    ],
                },
                {
                    "id": "close",
                    "type": "button",
                    "props": {"label": "Back", "action": {"type": "dismiss"}},
                },
            ],
        },
    }


def _compose_screen() -> dict[str, Any]:
    return {
        "id": "compose",
        "name": "Compose",
        "content": {
            "id": "root",
            "type": "vstack",
            "children": [
                {
                    "id": "save",
                    "type": "button",
                    "props": {
                        "label": "Save",
                        "action": {"type": "custom", "name": "saveTodo"},
                    },
                }
            ],
        },
    }


def _settings_screen() -> dict[str, Any]:
    return {
        "id": "settings",
        "name": "Settings",
        "content": {
            "id": "root",
            "type": "list",
            "children": [
                {"id": "about", "type": "text", "props": {"content": "About"}},
            ],
        },
    }


@pytest.fixture
def make_app() -> Callable[..., dict[str, Any]]:
    """Factory for a todo app definition with two tabs and one persisted model.

    Keyword arguments are merged over the top-level definition keys and
    ``config`` overrides are merged into the default config.
    """

    def _make(config: dict[str, Any] | None = None, **extra: Any) -> dict[str, Any]:
        app: dict[str, Any] = {
            "config": {
                "name": "Todo",
                "bundle_id": "com.example.todo",
                "display_name": "Todo",
                "accent_color": DEFAULT_PRIMARY,
                "uses_swift_data": True,
                **(config or {}),
            },
            "screens": [
                _list_screen(),
                _detail_screen(),
                _compose_screen(),
                _settings_screen(),
            ],
            "models": [
                {
                    "name": "TodoItem",
                    "is_persisted": True,
                    "properties": [
                        {"name": "title", "type": "string"},
                        {"name": "isDone", "type": "bool", "default_value": False},
                        {"name": "createdAt", "type": "date"},
                    ],
                }
            ],
            "entry_screen": "list",
            "tab_bar": {
                "tabs": [
                    {"screen": "list", "title": "Todos", "icon": "checklist"},
                    {"screen": "settings", "title": "Settings", "icon": "gear"},
                ]
            },
        }
        app.update(extra)
        return app

    return _make


@pytest.fixture
def todo_app(make_app) -> dict[str, Any]:
    """The default todo app definition."""
    return make_app()
