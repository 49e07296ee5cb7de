"""Unit tests for IR helpers."""

import pytest

from .lib import (
    BindingRef,
    Conditional,
    Container,
    Leaf,
    StringLit,
    camel_case,
    pascal_case,
)


class TestNames:
    """Tests for Swift identifier derivation."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("home", "Home"),
            ("task detail", "TaskDetail"),
            ("task-detail", "TaskDetail"),
            ("TaskDetail", "TaskDetail"),
            ("URLPreview", "URLPreview"),
            ("2fa", "V2fa"),
            ("!!!", "Item"),
        ],
    )
    def test_pascal_case(self, text, expected):
        assert pascal_case(text) == expected

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("detail", "detail"),
            ("task_detail", "taskDetail"),
            ("Task Detail", "taskDetail"),
            ("URL", "url"),
            ("default", "`default`"),
        ],
    )
    def test_camel_case(self, text, expected):
        assert camel_case(text) == expected


class TestVariants:
    """Tests for IR value semantics."""

    @pytest.mark.unit
    def test_structural_equality(self):
        first = Container("VStack", (Leaf("Text", StringLit("Hi")),))
        second = Container("VStack", (Leaf("Text", StringLit("Hi")),))
        assert first == second
        assert hash(first) == hash(second)

    @pytest.mark.unit
    def test_conditional_defaults_to_no_else(self):
        expr = Conditional(BindingRef("state", "isShown"), Leaf("Divider"))
        assert expr.otherwise is None
