"""Design token generation and resolution.

Example usage:
    >>> from swiftship.tokens import generate_design_tokens, TokenResolver
    >>> tokens = generate_design_tokens(primary="oklch(0.6 0.2 250)")
    >>> TokenResolver(tokens).color("primary").expr
    'Color(red: ..., green: ..., blue: ...)'
"""

from .lib import (
    FONT_WEIGHTS,
    SCALE_RATIOS,
    SHADOW_INTENSITY,
    ColorRole,
    ColorSlot,
    ColorTokens,
    ContrastResult,
    DesignTokens,
    FontSizeSlot,
    FontWeight,
    HarmonyType,
    MotionSlot,
    MotionTokens,
    OklchColor,
    RadiusSlot,
    ScaleRatio,
    ShadowSlot,
    ShadowTokens,
    ShadowValue,
    SpacingSlot,
    SpacingTokens,
    SpringPreset,
    TokenCategory,
    TokenResolver,
    TokenValue,
    TypographyTokens,
    adjust_chroma,
    adjust_lightness,
    calculate_scale_step,
    create_harmony,
    create_oklch_color,
    ensure_contrast,
    format_hex,
    format_oklch_css,
    generate_color_tokens,
    generate_design_tokens,
    generate_interactive_states,
    generate_lightness_scale,
    generate_motion_tokens,
    generate_shadow_tokens,
    generate_spacing_tokens,
    generate_typography_tokens,
    has_minimum_contrast,
    oklch_to_srgb,
    parse_color,
    parse_hex,
    parse_oklch,
    resolve_color,
    rotate_hue,
    srgb_to_oklch,
    swift_animation,
    swift_case,
    swift_color,
    swift_font_weight,
    swift_number,
    tokens_from_config,
)

__all__ = [
    # Slots
    "ColorSlot",
    "SpacingSlot",
    "RadiusSlot",
    "FontSizeSlot",
    "ShadowSlot",
    "MotionSlot",
    "FontWeight",
    "ScaleRatio",
    "HarmonyType",
    "ColorRole",
    "TokenCategory",
    "SCALE_RATIOS",
    "FONT_WEIGHTS",
    "SHADOW_INTENSITY",
    # Data
    "OklchColor",
    "ColorTokens",
    "TypographyTokens",
    "SpacingTokens",
    "ShadowValue",
    "ShadowTokens",
    "SpringPreset",
    "MotionTokens",
    "DesignTokens",
    "ContrastResult",
    "TokenValue",
    # Colour
    "create_oklch_color",
    "adjust_lightness",
    "adjust_chroma",
    "rotate_hue",
    "create_harmony",
    "generate_lightness_scale",
    "resolve_color",
    "generate_interactive_states",
    "parse_oklch",
    "parse_hex",
    "parse_color",
    "format_oklch_css",
    "oklch_to_srgb",
    "srgb_to_oklch",
    "format_hex",
    "generate_color_tokens",
    "has_minimum_contrast",
    "ensure_contrast",
    # Scales
    "calculate_scale_step",
    "generate_typography_tokens",
    "generate_spacing_tokens",
    "generate_shadow_tokens",
    "generate_motion_tokens",
    "generate_design_tokens",
    "tokens_from_config",
    # Swift
    "swift_number",
    "swift_color",
    "swift_case",
    "swift_font_weight",
    "swift_animation",
    "TokenResolver",
]
