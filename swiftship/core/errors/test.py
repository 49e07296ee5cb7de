"""Tests for the error taxonomy."""

import pytest

from .lib import (
    CodegenError,
    CrossReferenceError,
    DuplicateId,
    InvalidProps,
    InvariantError,
    ReferenceIssue,
    ResourceLimitExceeded,
    SchemaError,
    TokenResolutionFailure,
    UnknownModifier,
    UnknownType,
    UnresolvedBindingSource,
)


class TestHierarchy:
    """Family membership of concrete errors."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "error,family",
        [
            (UnknownType("widget"), SchemaError),
            (InvalidProps("text", "content", "field required"), SchemaError),
            (DuplicateId("a", "root.children[1]", "root"), SchemaError),
            (UnknownModifier("glow"), InvariantError),
            (TokenResolutionFailure("color", "neon"), InvariantError),
        ],
    )
    def test_family(self, error, family):
        assert isinstance(error, family)
        assert isinstance(error, CodegenError)

    @pytest.mark.unit
    def test_resource_limit_is_not_schema(self):
        error = ResourceLimitExceeded("depth", 40, 32)
        assert not isinstance(error, SchemaError)
        assert error.family == "resource"


class TestMessages:
    """Rendered messages and serialization."""

    @pytest.mark.unit
    def test_path_appended(self):
        error = UnknownType("widget", node_id="n1", path="root.children[0]")
        assert str(error) == "Unknown component type 'widget' (at root.children[0])"

    @pytest.mark.unit
    def test_screen_prefix(self):
        error = UnknownType("widget", path="root").in_screen("home")
        assert str(error) == "screen 'home': Unknown component type 'widget' (at root)"
        assert error.to_dict()["screen_id"] == "home"

    @pytest.mark.unit
    def test_invalid_props_to_dict(self):
        error = InvalidProps("slider", "min", "must be a number")
        located = error.locate("s1", "root.children[2]")
        data = located.to_dict()
        assert data["error"] == "InvalidProps"
        assert data["type"] == "slider"
        assert data["field_path"] == "min"
        assert data["node_id"] == "s1"
        assert data["path"] == "root.children[2]"

    @pytest.mark.unit
    def test_binding_error_carries_node(self):
        error = UnresolvedBindingSource("parameter", "item.title", "undeclared", "t1")
        assert error.node_id == "t1"
        assert "item.title" in str(error)


class TestCrossReferenceError:
    """Aggregated reference issues."""

    @pytest.mark.unit
    def test_lists_every_issue(self):
        issues = [
            ReferenceIssue("navigation", "ghost", "Screen 'ghost' does not exist"),
            ReferenceIssue("tab", "phantom", "Screen 'phantom' does not exist"),
        ]
        error = CrossReferenceError(issues)
        assert error.references == ["ghost", "phantom"]
        assert "ghost" in str(error)
        assert "phantom" in str(error)
        assert len(error.to_dict()["issues"]) == 2
