"""Tests for the app definition models."""

import pytest
from pydantic import ValidationError

from .lib import (
    AppConfig,
    AppDefinition,
    BindingSource,
    ComponentNode,
    CustomAction,
    DataBinding,
    DataModel,
    DismissAction,
    NavigateAction,
    ModelProperty,
    ScreenParameter,
    SWIFT_KEYWORDS,
    SheetAction,
    check_identifier,
    parse_action,
    value_matches,
)


def _config() -> AppConfig:
    return AppConfig(name="Notes", bundle_id="com.example.notes", display_name="Notes")


class TestComponentNode:
    """Tests for the recursive tree model."""

    @pytest.mark.unit
    def test_defaults(self):
        node = ComponentNode(id="a", type="text")
        assert node.props == {}
        assert node.children == []
        assert node.bindings == []
        assert node.modifiers == []

    @pytest.mark.unit
    def test_nested_from_dict(self):
        node = ComponentNode.model_validate(
            {
                "id": "root",
                "type": "vstack",
                "children": [
                    {"id": "t", "type": "text", "props": {"content": "Hi"}},
                    {"id": "b", "type": "button", "modifiers": [{"name": "padding"}]},
                ],
            }
        )
        assert [child.id for child in node.children] == ["t", "b"]
        assert node.children[1].modifiers[0].arguments == []

    @pytest.mark.unit
    def test_iter_nodes_preorder(self):
        node = ComponentNode.model_validate(
            {
                "id": "a",
                "type": "vstack",
                "children": [
                    {"id": "b", "type": "hstack", "children": [{"id": "c", "type": "text"}]},
                    {"id": "d", "type": "text"},
                ],
            }
        )
        assert [n.id for n in node.iter_nodes()] == ["a", "b", "c", "d"]

    @pytest.mark.unit
    def test_empty_id_rejected(self):
        with pytest.raises(ValidationError):
            ComponentNode(id="", type="text")


class TestDataBinding:
    """Tests for binding paths."""

    @pytest.mark.unit
    def test_segments(self):
        binding = DataBinding(property="content", source="state", path="task.title")
        assert binding.root == "task"
        assert binding.segments == ["task", "title"]
        assert binding.source == BindingSource.STATE

    @pytest.mark.unit
    @pytest.mark.parametrize("path", ["title", "task.title", "_a.b_2"])
    def test_well_formed(self, path):
        assert DataBinding(property="x", source="state", path=path).is_well_formed()

    @pytest.mark.unit
    @pytest.mark.parametrize("path", ["", "task.", ".title", "1abc", "a..b", "a-b"])
    def test_malformed(self, path):
        assert not DataBinding(property="x", source="state", path=path).is_well_formed()

    @pytest.mark.unit
    def test_unknown_source_rejected(self):
        with pytest.raises(ValidationError):
            DataBinding(property="x", source="global", path="a")

    @pytest.mark.unit
    def test_property_field_serializes(self):
        binding = DataBinding(property="text", source="state", path="draft")
        assert binding.model_dump() == {
            "property": "text",
            "source": "state",
            "path": "draft",
        }
        assert binding.root == "draft"

    @pytest.mark.unit
    def test_reserved_segments(self):
        def reserved(path):
            return DataBinding(property="x", source="state", path=path).reserved_segments()

        assert reserved("default") == ["default"]
        assert reserved("item.in") == ["in"]
        assert reserved("item.title") == []


class TestActions:
    """Tests for the discriminated action union."""

    @pytest.mark.unit
    def test_variants(self):
        assert isinstance(parse_action({"type": "navigate", "destination": "d"}), NavigateAction)
        assert isinstance(parse_action({"type": "dismiss"}), DismissAction)
        custom = parse_action({"type": "custom", "name": "save", "parameters": {"a": 1}})
        assert isinstance(custom, CustomAction)
        assert custom.parameters == {"a": 1}

    @pytest.mark.unit
    def test_sheet_accepts_content_key(self):
        action = parse_action({"type": "sheet", "content": "settings"})
        assert isinstance(action, SheetAction)
        assert action.destination == "settings"
        assert action.model_dump() == {"type": "sheet", "destination": "settings"}

    @pytest.mark.unit
    def test_unknown_discriminator(self):
        with pytest.raises(ValidationError):
            parse_action({"type": "teleport"})

    @pytest.mark.unit
    def test_custom_name_must_be_identifier(self):
        with pytest.raises(ValidationError):
            parse_action({"type": "custom", "name": "do it"})

    @pytest.mark.unit
    @pytest.mark.parametrize("name", ["return", "default", "self"])
    def test_custom_name_must_not_be_keyword(self, name):
        with pytest.raises(ValidationError, match="reserved Swift keyword"):
            parse_action({"type": "custom", "name": name})


class TestAppDefinition:
    """Tests for app-level models."""

    @pytest.mark.unit
    def test_config_defaults(self):
        config = _config()
        assert config.min_ios_version == "17.0"
        assert config.accent_color == "#007AFF"
        assert config.scale_ratio == "major_second"
        assert config.shadow_intensity == "normal"

    @pytest.mark.unit
    def test_lookup_helpers(self):
        app = AppDefinition(
            config=_config(),
            screens=[{"id": "home", "name": "Home", "content": {"id": "r", "type": "vstack"}}],
            models=[DataModel(name="TodoItem")],
            entry_screen="home",
        )
        assert app.screen_ids() == {"home"}
        assert app.get_screen("home").name == "Home"
        assert app.get_screen("missing") is None
        assert app.get_model("TodoItem").instance_name == "todoItem"

    @pytest.mark.unit
    def test_requires_a_screen(self):
        with pytest.raises(ValidationError):
            AppDefinition(config=_config(), screens=[], entry_screen="home")

    @pytest.mark.unit
    def test_json_round_trip(self):
        app = AppDefinition(
            config=_config(),
            screens=[{"id": "home", "name": "Home", "content": {"id": "r", "type": "vstack"}}],
            entry_screen="home",
            tab_bar={"tabs": [{"screen": "home", "title": "Home", "icon": "house"}]},
        )
        restored = AppDefinition.model_validate_json(app.model_dump_json())
        assert restored == app


class TestDefaults:
    """Tests for default values of model properties and screen parameters."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value,kind,element,expected",
        [
            ("a", "string", None, True),
            (1, "string", None, False),
            (True, "int", None, False),
            (3, "double", None, True),
            (0, "date", None, True),
            (["a", "b"], "array", None, True),
            ([1, "b"], "array", "int", False),
            (None, "bool", None, True),
            (2, "optional", "int", True),
        ],
    )
    def test_value_matches(self, value, kind, element, expected):
        assert value_matches(value, kind, element) is expected

    @pytest.mark.unit
    def test_model_property_default_checked(self):
        with pytest.raises(ValidationError):
            ModelProperty(name="count", type="int", default_value="three")

    @pytest.mark.unit
    def test_screen_parameter_default_checked(self):
        assert ScreenParameter(name="itemId", default="abc").type == "string"
        with pytest.raises(ValidationError):
            ScreenParameter(name="flag", type="bool", default=1)


class TestIdentifiers:
    """Tests for names emitted as Swift declarations."""

    @pytest.mark.unit
    def test_check_identifier(self):
        assert check_identifier("itemId") == "itemId"
        with pytest.raises(ValueError, match="not a valid identifier"):
            check_identifier("item id")
        with pytest.raises(ValueError, match="reserved Swift keyword"):
            check_identifier("init")

    @pytest.mark.unit
    def test_parameter_name_keyword_rejected(self):
        with pytest.raises(ValidationError, match="reserved Swift keyword"):
            ScreenParameter(name="in")

    @pytest.mark.unit
    def test_model_property_name_keyword_rejected(self):
        with pytest.raises(ValidationError, match="reserved Swift keyword"):
            ModelProperty(name="return", type="string")

    @pytest.mark.unit
    def test_model_name_keyword_rejected(self):
        with pytest.raises(ValidationError, match="reserved Swift keyword"):
            DataModel(name="Self")

    @pytest.mark.unit
    def test_keyword_set(self):
        assert "title" not in SWIFT_KEYWORDS
        assert "default" in SWIFT_KEYWORDS
