"""Tests for design token generation."""

from dataclasses import asdict, fields

import pytest

from swiftship.core.errors import TokenResolutionFailure

from .lib import (
    ColorRole,
    ColorSlot,
    ColorTokens,
    OklchColor,
    TokenResolver,
    adjust_chroma,
    adjust_lightness,
    create_harmony,
    ensure_contrast,
    format_hex,
    format_oklch_css,
    generate_color_tokens,
    generate_design_tokens,
    generate_lightness_scale,
    generate_shadow_tokens,
    generate_spacing_tokens,
    generate_typography_tokens,
    has_minimum_contrast,
    oklch_to_srgb,
    parse_color,
    parse_oklch,
    resolve_color,
    rotate_hue,
    swift_animation,
    swift_case,
    swift_color,
    swift_number,
    generate_motion_tokens,
)

PRIMARY = OklchColor(0.6, 0.2, 250)


class TestColorMath:
    """Tests for clamped OKLCH arithmetic."""

    @pytest.mark.unit
    def test_lightness_clamped(self):
        assert adjust_lightness(OklchColor(0.98, 0.1, 10), 0.1).l == 1.0
        assert adjust_lightness(OklchColor(0.02, 0.1, 10), -0.1).l == 0.0

    @pytest.mark.unit
    def test_chroma_clamped(self):
        assert adjust_chroma(OklchColor(0.5, 0.38, 10), 0.1).c == 0.4
        assert adjust_chroma(OklchColor(0.5, 0.05, 10), -0.1).c == 0.0

    @pytest.mark.unit
    def test_hue_wraps(self):
        assert rotate_hue(OklchColor(0.5, 0.1, 300), 90).h == pytest.approx(30)
        assert rotate_hue(OklchColor(0.5, 0.1, 10), -30).h == pytest.approx(340)

    @pytest.mark.unit
    def test_harmony_sizes(self):
        assert len(create_harmony(PRIMARY, "complementary")) == 2
        triad = create_harmony(PRIMARY, "triadic")
        assert [round(c.h) for c in triad] == [250, 10, 130]

    @pytest.mark.unit
    def test_lightness_scale(self):
        scale = generate_lightness_scale(PRIMARY, steps=4)
        assert [round(c.l, 2) for c in scale] == [0.2, 0.4, 0.6, 0.8]
        assert all(c.h == PRIMARY.h for c in scale)

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "base,role,expected_l",
        [
            (OklchColor(0.7, 0.2, 10), ColorRole.HOVER, 0.65),
            (OklchColor(0.3, 0.2, 10), ColorRole.HOVER, 0.35),
            (OklchColor(0.7, 0.2, 10), ColorRole.PRESSED, 0.6),
            (OklchColor(0.3, 0.2, 10), ColorRole.PRESSED, 0.4),
        ],
    )
    def test_interactive_lightness(self, base, role, expected_l):
        assert resolve_color(base, role).l == pytest.approx(expected_l)

    @pytest.mark.unit
    def test_disabled_role(self):
        disabled = resolve_color(OklchColor(0.7, 0.2, 10), "disabled")
        assert disabled.c == pytest.approx(0.1)
        assert disabled.alpha == 0.5


class TestParsing:
    """Tests for colour parsing and formatting."""

    @pytest.mark.unit
    def test_parse_oklch(self):
        assert parse_oklch("oklch(0.7 0.15 250)") == OklchColor(0.7, 0.15, 250)
        assert parse_oklch("oklch(0.7 0.15 250 / 0.5)").alpha == 0.5

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["rgb(1, 2, 3)", "oklch(a b c)", "oklch(0.5 0.1)"])
    def test_parse_oklch_invalid(self, value):
        with pytest.raises(ValueError):
            parse_oklch(value)

    @pytest.mark.unit
    def test_css_format(self):
        assert format_oklch_css(OklchColor(0.7, 0.15, 250)) == "oklch(0.7 0.15 250)"
        assert format_oklch_css(OklchColor(0, 0, 0, 0.4)) == "oklch(0 0 0 / 0.4)"

    @pytest.mark.unit
    def test_extremes_to_srgb(self):
        assert format_hex(OklchColor(1.0, 0, 0)) == "#ffffff"
        assert format_hex(OklchColor(0.0, 0, 0)) == "#000000"

    @pytest.mark.unit
    def test_hex_round_trip_is_close(self):
        color = parse_color("#007AFF")
        assert format_hex(color) == "#007aff"
        assert 240 < color.h < 270

    @pytest.mark.unit
    def test_srgb_channels_clamped(self):
        for channel in oklch_to_srgb(OklchColor(0.9, 0.4, 30)):
            assert 0.0 <= channel <= 1.0


class TestColorTokens:
    """Tests for palette generation."""

    @pytest.mark.unit
    def test_deterministic(self):
        """Identical inputs give identical OKLCH triples for every slot."""
        first = generate_color_tokens(PRIMARY, is_dark=False)
        second = generate_color_tokens(PRIMARY, is_dark=False)
        for slot in ColorSlot:
            a, b = first.get(slot), second.get(slot)
            assert (a.l, a.c, a.h, a.alpha) == (b.l, b.c, b.h, b.alpha)

    @pytest.mark.unit
    def test_all_slots_present(self):
        tokens = generate_color_tokens(PRIMARY)
        assert {f.name for f in fields(ColorTokens)} == {s.value for s in ColorSlot}
        assert len(ColorSlot) == 22
        assert isinstance(tokens.get("text_primary"), OklchColor)

    @pytest.mark.unit
    def test_derived_accent_and_secondary(self):
        tokens = generate_color_tokens(PRIMARY)
        assert tokens.accent.h == pytest.approx(40)
        assert tokens.accent.c == pytest.approx(0.25)
        assert tokens.secondary.c == pytest.approx(0.12)

    @pytest.mark.unit
    def test_explicit_accent_kept(self):
        accent = OklchColor(0.5, 0.1, 90)
        assert generate_color_tokens(PRIMARY, accent=accent).accent == accent

    @pytest.mark.unit
    def test_light_and_dark_tables(self):
        light = generate_color_tokens(PRIMARY, is_dark=False)
        dark = generate_color_tokens(PRIMARY, is_dark=True)
        assert light.background.l == 0.98
        assert dark.background.l == 0.15
        assert light.background.h == dark.background.h == PRIMARY.h
        assert light.overlay.alpha == 0.4
        assert dark.overlay.alpha == 0.6

    @pytest.mark.unit
    def test_semantic_colors_fixed(self):
        tokens = generate_color_tokens(OklchColor(0.4, 0.1, 10))
        assert (tokens.success.h, tokens.warning.h, tokens.error.h, tokens.info.h) == (
            145,
            85,
            25,
            250,
        )


class TestContrast:
    """Tests for contrast checking and repair."""

    @pytest.mark.unit
    def test_compliant_input_unchanged(self):
        fg, bg = OklchColor(0.2, 0.02, 250), OklchColor(0.98, 0.005, 250)
        result = ensure_contrast(fg, bg, 0.4)
        assert result.color is fg
        assert result.satisfied
        assert result.attempts == 0

    @pytest.mark.unit
    def test_repair_reaches_target(self):
        fg, bg = OklchColor(0.7, 0.02, 250), OklchColor(0.95, 0.01, 250)
        result = ensure_contrast(fg, bg, 0.4)
        assert result.satisfied
        assert has_minimum_contrast(result.color, bg, 0.4)
        assert result.color.l < fg.l

    @pytest.mark.unit
    def test_shortfall_is_observable(self):
        fg, bg = OklchColor(0.5, 0.0, 0), OklchColor(0.55, 0.0, 0)
        result = ensure_contrast(fg, bg, 0.9)
        assert not result.satisfied
        assert result.achieved_delta < 0.9
        assert result.attempts == 10

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "fg_l,bg_l",
        [(0.9, 0.55), (0.1, 0.45), (0.5, 0.5), (0.6, 0.58), (0.05, 0.2), (0.95, 0.9)],
    )
    def test_never_worse_than_input(self, fg_l, bg_l):
        fg, bg = OklchColor(fg_l, 0.1, 10), OklchColor(bg_l, 0.1, 10)
        result = ensure_contrast(fg, bg, 0.4)
        assert abs(result.color.l - bg.l) >= abs(fg.l - bg.l)
        assert result.achieved_delta == pytest.approx(abs(result.color.l - bg.l))


class TestScales:
    """Tests for typography, spacing, shadow and motion tokens."""

    @pytest.mark.unit
    def test_type_scale_major_second(self):
        sizes = generate_typography_tokens().sizes
        assert sizes["base"] == 17
        assert sizes["lg"] == 19  # 19.125
        assert sizes["xl"] == 21.5  # 21.52
        assert sizes["sm"] == 15  # 15.11
        assert sizes["xs"] == 13.5  # 13.43

    @pytest.mark.unit
    def test_sizes_on_half_points(self):
        for size in generate_typography_tokens(16, "golden_ratio").sizes.values():
            assert (size * 2) == int(size * 2)

    @pytest.mark.unit
    def test_unknown_ratio(self):
        with pytest.raises(ValueError):
            generate_typography_tokens(17, "silver_ratio")

    @pytest.mark.unit
    def test_spacing_scale(self):
        spacing = generate_spacing_tokens(4)
        assert spacing.scale["0.5"] == 2
        assert spacing.scale["24"] == 96
        assert spacing.radii["2xl"] == 24
        assert spacing.radii["full"] == 9999

    @pytest.mark.unit
    def test_shadow_intensity_scales_alpha_only(self):
        normal = generate_shadow_tokens("normal")
        strong = generate_shadow_tokens("strong")
        for level in ("sm", "md", "lg", "xl"):
            a, b = getattr(normal, level), getattr(strong, level)
            assert (a.x, a.y, a.blur, a.spread) == (b.x, b.y, b.blur, b.spread)
            assert b.color.alpha == pytest.approx(a.color.alpha * 1.5)
        assert normal.none.color.alpha == 0

    @pytest.mark.unit
    def test_design_tokens_serializable(self):
        tokens = generate_design_tokens("oklch(0.6 0.2 250)", is_dark=True)
        data = asdict(tokens)
        assert data["is_dark"] is True
        assert data["shadows"]["md"]["color"]["alpha"] == pytest.approx(0.1)


class TestSwiftExpressions:
    """Tests for Swift literal helpers and the resolver."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value,expected", [(16, "16"), (16.0, "16"), (0.5, "0.5"), (0.1, "0.1"), (2.125, "2.125")]
    )
    def test_swift_number(self, value, expected):
        assert swift_number(value) == expected

    @pytest.mark.unit
    def test_swift_color(self):
        assert swift_color(OklchColor(1.0, 0, 0)) == "Color(red: 1.000, green: 1.000, blue: 1.000)"
        assert swift_color(OklchColor(0, 0, 0, 0.15)).endswith("opacity: 0.15)")

    @pytest.mark.unit
    def test_swift_case(self):
        assert swift_case("ultra_light") == ".ultraLight"
        assert swift_case("bold") == ".bold"

    @pytest.mark.unit
    def test_swift_animation(self):
        motion = generate_motion_tokens()
        assert swift_animation("snappy", motion) == (
            ".interpolatingSpring(mass: 1, stiffness: 400, damping: 30)"
        )
        assert swift_animation("normal", motion) == ".easeInOut(duration: 0.2)"

    @pytest.mark.unit
    def test_resolver(self):
        resolver = TokenResolver(generate_design_tokens(PRIMARY))
        assert resolver.spacing("4").expr == "16"
        assert resolver.radius("md").expr == "8"
        assert resolver.font_size("base").expr == ".system(size: 17)"
        assert resolver.color(ColorSlot.PRIMARY).expr.startswith("Color(red:")

    @pytest.mark.unit
    def test_resolver_unknown_slot(self):
        resolver = TokenResolver(generate_design_tokens(PRIMARY))
        with pytest.raises(TokenResolutionFailure) as exc:
            resolver.color("neon", node_id="n1")
        assert exc.value.node_id == "n1"
        assert exc.value.category == "color"
