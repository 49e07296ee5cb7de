"""Unit tests for tree normalization."""

import pytest

from swiftship.catalog import CATALOG
from swiftship.core.errors import (
    DuplicateId,
    InvalidProps,
    InvalidStructure,
    ResourceLimitExceeded,
    UnknownModifier,
    UnknownType,
)
from swiftship.definition import ComponentNode

from .lib import ReferenceKind, TreeLimits, measure, normalize


def _chain(depth: int) -> dict:
    """A vstack nested ``depth`` levels deep."""
    node = {"id": f"n{depth}", "type": "text"}
    for level in reversed(range(1, depth)):
        node = {"id": f"n{level}", "type": "vstack", "children": [node]}
    return node


class TestNormalize:
    """Tests for successful normalization."""

    @pytest.mark.unit
    def test_defaults_filled(self):
        tree = normalize({"id": "root", "type": "vstack"})
        assert tree.root.props == {"alignment": "center", "spacing": "2"}

    @pytest.mark.unit
    def test_children_order_preserved(self):
        tree = normalize(
            {
                "id": "root",
                "type": "vstack",
                "children": [
                    {"id": "a", "type": "text"},
                    {"id": "b", "type": "divider"},
                    {"id": "c", "type": "spacer"},
                ],
            }
        )
        assert [child.id for child in tree.root.children] == ["a", "b", "c"]
        assert tree.root.children[1].path == "root.children[1]"

    @pytest.mark.unit
    def test_stats(self):
        tree = normalize(_chain(4))
        assert tree.node_count == 4
        assert tree.max_depth == 4

    @pytest.mark.unit
    def test_accepts_component_node(self):
        node = ComponentNode(id="root", type="text", props={"content": "Hi"})
        tree = normalize(node)
        assert tree.root.props["content"] == "Hi"
        assert tree.root.meta is CATALOG.lookup("text")

    @pytest.mark.unit
    def test_normalize_is_idempotent(self):
        raw = {
            "id": "root",
            "type": "vstack",
            "children": [{"id": "t", "type": "text", "props": {"color": "accent"}}],
            "modifiers": [{"name": "padding", "arguments": [4]}],
        }
        once = normalize(raw)
        twice = normalize(once.root.to_node())
        assert twice.root == once.root

    @pytest.mark.unit
    def test_modifier_arguments_normalized(self):
        tree = normalize(
            {
                "id": "root",
                "type": "text",
                "modifiers": [{"name": "padding", "arguments": [4, "horizontal"]}],
            }
        )
        assert tree.root.modifiers[0].arguments == ["4", "horizontal"]

    @pytest.mark.unit
    def test_get_by_id(self):
        tree = normalize(_chain(3))
        assert tree.get("n3").type == "text"
        assert tree.get("missing") is None


class TestReferences:
    """Tests for deferred screen references."""

    @pytest.mark.unit
    def test_button_action(self):
        tree = normalize(
            {
                "id": "go",
                "type": "button",
                "props": {"action": {"type": "navigate", "destination": "detail"}},
            }
        )
        (ref,) = tree.references
        assert ref.target == "detail"
        assert ref.kind == ReferenceKind.PUSH
        assert ref.property == "action.destination"
        assert ref.node_id == "go"

    @pytest.mark.unit
    def test_all_reference_sources(self):
        tree = normalize(
            {
                "id": "root",
                "type": "vstack",
                "children": [
                    {
                        "id": "link",
                        "type": "navigationlink",
                        "props": {"destination": "a"},
                    },
                    {"id": "sheet", "type": "sheet", "props": {"destination": "b"}},
                    {
                        "id": "cover",
                        "type": "fullscreencover",
                        "props": {"destination": "c"},
                    },
                    {
                        "id": "tabs",
                        "type": "tabview",
                        "props": {
                            "tabs": [{"screen": "d", "title": "D", "icon": "house"}]
                        },
                    },
                    {
                        "id": "menu",
                        "type": "menu",
                        "props": {
                            "items": [
                                {
                                    "label": "Open",
                                    "action": {"type": "sheet", "destination": "e"},
                                }
                            ]
                        },
                    },
                ],
            }
        )
        assert [(r.target, r.kind) for r in tree.references] == [
            ("a", ReferenceKind.PUSH),
            ("b", ReferenceKind.SHEET),
            ("c", ReferenceKind.COVER),
            ("d", ReferenceKind.TAB),
            ("e", ReferenceKind.SHEET),
        ]
        assert tree.references[-1].property == "items[0].action.destination"

    @pytest.mark.unit
    def test_dismiss_and_custom_are_not_references(self):
        tree = normalize(
            {
                "id": "root",
                "type": "alert",
                "props": {
                    "actions": [
                        {"label": "OK", "action": {"type": "dismiss"}},
                        {"label": "Log", "action": {"type": "custom", "name": "log"}},
                    ]
                },
            }
        )
        assert tree.references == ()


class TestErrors:
    """Tests for rejected trees."""

    @pytest.mark.unit
    def test_unknown_type_reports_location(self):
        raw = {
            "id": "root",
            "type": "vstack",
            "children": [
                {"id": "a", "type": "text"},
                {"id": "b", "type": "hstack", "children": [{"id": "c", "type": "blink"}]},
            ],
        }
        with pytest.raises(UnknownType) as exc:
            normalize(raw)
        assert exc.value.node_id == "c"
        assert exc.value.path == "root.children[1].children[0]"

    @pytest.mark.unit
    def test_invalid_props_reports_location(self):
        raw = {
            "id": "root",
            "type": "vstack",
            "children": [{"id": "t", "type": "toggle", "props": {"is_on": "on"}}],
        }
        with pytest.raises(InvalidProps) as exc:
            normalize(raw)
        assert exc.value.node_id == "t"
        assert exc.value.path == "root.children[0]"
        assert exc.value.field_path == "is_on"

    @pytest.mark.unit
    def test_first_error_in_preorder_wins(self):
        raw = {
            "id": "root",
            "type": "vstack",
            "children": [
                {"id": "a", "type": "vstack", "children": [{"id": "x", "type": "nope"}]},
                {"id": "b", "type": "also_nope"},
            ],
        }
        with pytest.raises(UnknownType) as exc:
            normalize(raw)
        assert exc.value.node_id == "x"

    @pytest.mark.unit
    def test_duplicate_id(self):
        raw = {
            "id": "root",
            "type": "vstack",
            "children": [{"id": "dupe", "type": "text"}, {"id": "dupe", "type": "text"}],
        }
        with pytest.raises(DuplicateId) as exc:
            normalize(raw)
        assert exc.value.path == "root.children[1]"
        assert exc.value.first_path == "root.children[0]"

    @pytest.mark.unit
    def test_leaf_with_children(self):
        raw = {"id": "t", "type": "text", "children": [{"id": "x", "type": "text"}]}
        with pytest.raises(InvalidStructure, match="cannot have children"):
            normalize(raw)

    @pytest.mark.unit
    def test_too_many_children(self):
        raw = {
            "id": "root",
            "type": "emptystate",
            "children": [{"id": f"b{i}", "type": "button"} for i in range(4)],
        }
        with pytest.raises(InvalidStructure, match="at most 3"):
            normalize(raw)

    @pytest.mark.unit
    def test_toolbar_requires_parent(self):
        with pytest.raises(InvalidStructure, match="inside a parent"):
            normalize({"id": "bar", "type": "toolbar"})

    @pytest.mark.unit
    def test_sheet_destination_and_content_conflict(self):
        raw = {
            "id": "s",
            "type": "sheet",
            "props": {"destination": "detail"},
            "children": [{"id": "t", "type": "text"}],
        }
        with pytest.raises(InvalidStructure, match="inline content"):
            normalize(raw)

    @pytest.mark.unit
    def test_cycle_detected(self):
        root = ComponentNode(id="root", type="vstack")
        child = ComponentNode(id="child", type="vstack")
        root.children.append(child)
        child.children.append(root)
        with pytest.raises(InvalidStructure, match="Cycle"):
            normalize(root)

    @pytest.mark.unit
    def test_binding_on_undeclared_property(self):
        raw = {
            "id": "t",
            "type": "text",
            "bindings": [{"property": "font", "source": "state", "path": "style"}],
        }
        with pytest.raises(InvalidProps) as exc:
            normalize(raw)
        assert exc.value.field_path == "bindings[0].property"

    @pytest.mark.unit
    @pytest.mark.parametrize("path", ["", "user..name", "1st", "a-b"])
    def test_malformed_binding_path(self, path):
        raw = {
            "id": "t",
            "type": "text",
            "bindings": [{"property": "content", "source": "state", "path": path}],
        }
        with pytest.raises(InvalidProps) as exc:
            normalize(raw)
        assert exc.value.field_path == "bindings[0].path"

    @pytest.mark.unit
    @pytest.mark.parametrize("path", ["default", "item.in", "return"])
    def test_keyword_binding_path_rejected(self, path):
        raw = {
            "id": "t",
            "type": "text",
            "bindings": [{"property": "content", "source": "state", "path": path}],
        }
        with pytest.raises(InvalidProps, match="reserved Swift keyword") as exc:
            normalize(raw)
        assert exc.value.field_path == "bindings[0].path"
        assert exc.value.node_id == "t"

    @pytest.mark.unit
    def test_unknown_modifier_carries_node(self):
        raw = {"id": "t", "type": "text", "modifiers": [{"name": "blur"}]}
        with pytest.raises(UnknownModifier) as exc:
            normalize(raw)
        assert exc.value.node_id == "t"
        assert exc.value.path == "root"

    @pytest.mark.unit
    def test_bad_modifier_argument(self):
        raw = {
            "id": "t",
            "type": "text",
            "modifiers": [
                {"name": "padding"},
                {"name": "background", "arguments": ["neon"]},
            ],
        }
        with pytest.raises(InvalidProps) as exc:
            normalize(raw)
        assert exc.value.field_path == "modifiers[1].arguments[0]"

    @pytest.mark.unit
    def test_malformed_raw_node(self):
        with pytest.raises(InvalidStructure) as exc:
            normalize({"id": "root", "type": "vstack", "children": [{"type": "text"}]})
        assert exc.value.path == "root.children[0].id"


class TestLimits:
    """Tests for resource ceilings."""

    @pytest.mark.unit
    def test_depth_limit(self):
        with pytest.raises(ResourceLimitExceeded) as exc:
            normalize(_chain(5), limits=TreeLimits(max_depth=4))
        assert exc.value.limit == "depth"
        assert exc.value.maximum == 4

    @pytest.mark.unit
    def test_node_limit(self):
        raw = {
            "id": "root",
            "type": "vstack",
            "children": [{"id": f"t{i}", "type": "text"} for i in range(10)],
        }
        with pytest.raises(ResourceLimitExceeded) as exc:
            normalize(raw, limits=TreeLimits(max_nodes=5))
        assert exc.value.limit == "node count"

    @pytest.mark.unit
    def test_limits_checked_before_validation(self):
        """An oversize tree fails on size even when it also has bad types."""
        raw = {
            "id": "root",
            "type": "nope",
            "children": [{"id": f"t{i}", "type": "nope"} for i in range(10)],
        }
        with pytest.raises(ResourceLimitExceeded):
            normalize(raw, limits=TreeLimits(max_nodes=5))

    @pytest.mark.unit
    def test_measure(self):
        assert measure(ComponentNode.model_validate(_chain(3)), TreeLimits()) == (3, 3)
