"""Unit tests for the component catalog."""

import pytest

from swiftship.core.errors import (
    DuplicateType,
    InvalidProps,
    UnknownModifier,
    UnknownType,
)

from .components import CATALOG, SEED_COMPONENTS, TextProps, build_default_catalog
from .lib import (
    ComponentCatalog,
    ComponentCategory,
    ComponentConstraints,
    ComponentMeta,
    Props,
    ValueType,
)

EXPECTED_TYPES = {
    "primitives": {"text", "button", "image", "icon", "spacer", "divider"},
    "layout": {"vstack", "hstack", "zstack", "scrollview", "list", "grid", "section"},
    "input": {
        "textfield",
        "securefield",
        "texteditor",
        "toggle",
        "picker",
        "datepicker",
        "slider",
        "stepper",
    },
    "navigation": {
        "navigationstack",
        "navigationlink",
        "tabview",
        "sheet",
        "fullscreencover",
        "alert",
        "confirmationdialog",
        "menu",
        "toolbar",
    },
    "data-display": {"label"},
    "feedback": {"progressview"},
    "patterns": {"emptystate"},
}


class BadgeProps(Props):
    count: int = 0


BADGE = ComponentMeta(
    type="badge",
    name="Badge",
    category=ComponentCategory.FEEDBACK,
    description="A small count indicator",
    icon="circle.fill",
    props_schema=BadgeProps,
    constraints=ComponentConstraints(can_have_children=False),
)


class TestSeedTable:
    """Tests for default catalog completeness."""

    @pytest.mark.unit
    def test_has_33_types(self):
        assert len(CATALOG) == 33
        assert len(SEED_COMPONENTS) == 33

    @pytest.mark.unit
    @pytest.mark.parametrize("category,types", sorted(EXPECTED_TYPES.items()))
    def test_categories(self, category, types):
        assert {meta.type for meta in CATALOG.by_category(category)} == types

    @pytest.mark.unit
    def test_every_type_has_description(self):
        for meta in CATALOG:
            assert meta.description, f"{meta.type} missing description"
            assert isinstance(meta.category, ComponentCategory)

    @pytest.mark.unit
    def test_input_types_declare_bindable_value(self):
        for meta in CATALOG.by_category("input"):
            assert any(prop.two_way for prop in meta.bindable), meta.type

    @pytest.mark.unit
    def test_to_dict_exports_schema(self):
        data = CATALOG.lookup("toggle").to_dict()
        assert data["category"] == "input"
        assert data["bindable"]["is_on"] == {"type": "bool", "two_way": True}
        assert "is_on" in data["props_schema"]["properties"]

    @pytest.mark.unit
    def test_visibility_is_universal(self):
        meta = CATALOG.lookup("divider")
        assert meta.binding("is_visible").value_type == ValueType.BOOL
        assert meta.binding("content") is None


class TestRegistration:
    """Tests for register / lookup."""

    @pytest.mark.unit
    def test_register_and_lookup(self):
        catalog = ComponentCatalog()
        catalog.register(BADGE)
        assert catalog.lookup("badge") is BADGE
        assert "badge" in catalog

    @pytest.mark.unit
    def test_duplicate_type_rejected(self):
        catalog = ComponentCatalog([BADGE])
        with pytest.raises(DuplicateType) as exc:
            catalog.register(BADGE)
        assert exc.value.type_tag == "badge"

    @pytest.mark.unit
    def test_unknown_type(self):
        with pytest.raises(UnknownType) as exc:
            CATALOG.lookup("carousel")
        assert exc.value.type_tag == "carousel"

    @pytest.mark.unit
    def test_default_catalog_is_frozen(self):
        with pytest.raises(RuntimeError):
            CATALOG.register(BADGE)

    @pytest.mark.unit
    def test_extend_leaves_default_untouched(self):
        extended = CATALOG.extend(BADGE)
        assert "badge" in extended
        assert "badge" not in CATALOG
        assert len(extended) == 34

    @pytest.mark.unit
    def test_build_returns_fresh_instance(self):
        assert build_default_catalog() is not CATALOG


class TestValidation:
    """Tests for prop validation and default filling."""

    @pytest.mark.unit
    @pytest.mark.parametrize("type_tag", sorted(CATALOG.types()))
    def test_empty_props_yield_defaults(self, type_tag):
        """Validating {} returns exactly the declared defaults."""
        if CATALOG.required_props(type_tag):
            pytest.skip("type has required properties")
        assert CATALOG.validate(type_tag, {}) == CATALOG.defaults(type_tag)

    @pytest.mark.unit
    @pytest.mark.parametrize("meta", SEED_COMPONENTS, ids=lambda meta: meta.type)
    def test_sample_props_validate(self, meta):
        props = CATALOG.validate(meta.type, meta.sample_props)
        for key, value in meta.sample_props.items():
            assert props[key] == value

    @pytest.mark.unit
    def test_vstack_defaults(self):
        assert CATALOG.validate("vstack", {}) == {"alignment": "center", "spacing": "2"}

    @pytest.mark.unit
    def test_missing_keys_are_merged(self):
        props = CATALOG.validate("text", {"content": "Hi", "color": "accent"})
        assert props["content"] == "Hi"
        assert props["color"] == "accent"
        assert props["font"] == "body"

    @pytest.mark.unit
    def test_numeric_spacing_accepted(self):
        assert CATALOG.validate("hstack", {"spacing": 4})["spacing"] == "4"
        assert CATALOG.validate("hstack", {"spacing": 0.5})["spacing"] == "0.5"

    @pytest.mark.unit
    def test_required_field_missing(self):
        with pytest.raises(InvalidProps) as exc:
            CATALOG.validate("navigationlink", {})
        assert exc.value.field_path == "destination"
        assert exc.value.type_tag == "navigationlink"

    @pytest.mark.unit
    def test_wrong_primitive_kind(self):
        with pytest.raises(InvalidProps) as exc:
            CATALOG.validate("toggle", {"is_on": "yes"})
        assert exc.value.field_path == "is_on"

    @pytest.mark.unit
    def test_enum_outside_allowed_set(self):
        with pytest.raises(InvalidProps) as exc:
            CATALOG.validate("vstack", {"alignment": "justify"})
        assert exc.value.field_path == "alignment"

    @pytest.mark.unit
    def test_token_slot_outside_enum(self):
        with pytest.raises(InvalidProps) as exc:
            CATALOG.validate("text", {"color": "chartreuse"})
        assert exc.value.field_path == "color"

    @pytest.mark.unit
    def test_numeric_out_of_range(self):
        with pytest.raises(InvalidProps) as exc:
            CATALOG.validate("grid", {"columns": 9})
        assert exc.value.field_path == "columns"

    @pytest.mark.unit
    def test_unknown_key_rejected(self):
        with pytest.raises(InvalidProps) as exc:
            CATALOG.validate("divider", {"thickness": 2})
        assert exc.value.field_path == "thickness"

    @pytest.mark.unit
    def test_nested_field_path(self):
        with pytest.raises(InvalidProps) as exc:
            CATALOG.validate("tabview", {"tabs": [{"screen": "home", "icon": "house"}]})
        assert exc.value.field_path == "tabs[0].title"

    @pytest.mark.unit
    def test_slider_range_checked(self):
        with pytest.raises(InvalidProps) as exc:
            CATALOG.validate("slider", {"min_value": 10, "max_value": 5})
        assert exc.value.field_path == "max_value"

    @pytest.mark.unit
    def test_picker_selection_must_be_an_option(self):
        options = [{"label": "A", "value": "a"}]
        assert CATALOG.validate("picker", {"options": options, "selection": "a"})
        with pytest.raises(InvalidProps):
            CATALOG.validate("picker", {"options": options, "selection": "b"})

    @pytest.mark.unit
    def test_button_action_parsed(self):
        props = CATALOG.validate(
            "button", {"action": {"type": "navigate", "destination": "detail"}}
        )
        assert props["action"] == {"type": "navigate", "destination": "detail"}

    @pytest.mark.unit
    def test_button_action_unknown_variant(self):
        with pytest.raises(InvalidProps) as exc:
            CATALOG.validate("button", {"action": {"type": "teleport"}})
        assert exc.value.field_path.startswith("action")

    @pytest.mark.unit
    def test_schema_model_is_exposed(self):
        assert CATALOG.lookup("text").props_schema is TextProps


class TestModifiers:
    """Tests for the fixed modifier table."""

    @pytest.mark.unit
    def test_unknown_modifier(self):
        with pytest.raises(UnknownModifier):
            CATALOG.modifier("blur")

    @pytest.mark.unit
    def test_padding_normalizes_spacing(self):
        assert CATALOG.validate_modifier("text", "padding", [4]) == ("4",)
        assert CATALOG.validate_modifier("text", "padding", []) == ()

    @pytest.mark.unit
    def test_optional_argument_may_be_null(self):
        assert CATALOG.validate_modifier("text", "padding", [None, "horizontal"]) == (
            None,
            "horizontal",
        )

    @pytest.mark.unit
    def test_required_argument_missing(self):
        with pytest.raises(InvalidProps) as exc:
            CATALOG.validate_modifier("text", "background", [])
        assert exc.value.field_path == "modifiers.arguments"

    @pytest.mark.unit
    def test_argument_kind_checked(self):
        with pytest.raises(InvalidProps) as exc:
            CATALOG.validate_modifier("text", "background", ["magenta"])
        assert exc.value.field_path == "modifiers.arguments[0]"

    @pytest.mark.unit
    def test_number_rejects_bool(self):
        with pytest.raises(InvalidProps):
            CATALOG.validate_modifier("text", "opacity", [True])

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [2.5, 0, -1, True, "2"])
    def test_line_limit_requires_positive_integer(self, value):
        with pytest.raises(InvalidProps, match="positive integer"):
            CATALOG.validate_modifier("text", "line_limit", [value])

    @pytest.mark.unit
    def test_line_limit_accepts_integer(self):
        assert CATALOG.validate_modifier("text", "line_limit", [3]) == (3,)

    @pytest.mark.unit
    def test_swift_names(self):
        assert CATALOG.modifier("corner_radius").swift_name == "clipShape"
        assert CATALOG.modifier("foreground_style").swift_name == "foregroundStyle"
