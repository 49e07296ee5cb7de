"""Design token generation and resolution.

Colours are handled in OKLCH so lightness and chroma adjustments stay
perceptually uniform. Every function here is pure: identical inputs give
identical token sets, and derived colours (accent, secondary, interactive
states) are computed from explicit parameters rather than hidden defaults.

Swift output is produced by ``swift_*`` helpers and ``TokenResolver``, which
maps closed slot names to ready-to-print Swift value expressions.
"""

import math
import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

from swiftship.core.errors import TokenResolutionFailure

# =============================================================================
# Slot enums
# =============================================================================


class ColorSlot(str, Enum):
    """Named colour slots of a token set."""

    PRIMARY = "primary"
    SECONDARY = "secondary"
    ACCENT = "accent"
    BACKGROUND = "background"
    BACKGROUND_ELEVATED = "background_elevated"
    SURFACE = "surface"
    SURFACE_ELEVATED = "surface_elevated"
    TEXT_PRIMARY = "text_primary"
    TEXT_SECONDARY = "text_secondary"
    TEXT_TERTIARY = "text_tertiary"
    TEXT_INVERSE = "text_inverse"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    INFO = "info"
    BORDER = "border"
    DIVIDER = "divider"
    SHADOW = "shadow"
    OVERLAY = "overlay"
    PRIMARY_HOVER = "primary_hover"
    PRIMARY_PRESSED = "primary_pressed"
    PRIMARY_DISABLED = "primary_disabled"


class SpacingSlot(str, Enum):
    """Spacing scale steps, in multiples of the base unit."""

    S0 = "0"
    S0_5 = "0.5"
    S1 = "1"
    S1_5 = "1.5"
    S2 = "2"
    S2_5 = "2.5"
    S3 = "3"
    S4 = "4"
    S5 = "5"
    S6 = "6"
    S8 = "8"
    S10 = "10"
    S12 = "12"
    S16 = "16"
    S20 = "20"
    S24 = "24"


class RadiusSlot(str, Enum):
    NONE = "none"
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"
    XL2 = "2xl"
    XL3 = "3xl"
    FULL = "full"


class FontSizeSlot(str, Enum):
    """Steps of the modular type scale (``base`` is the body size)."""

    XS = "xs"
    SM = "sm"
    BASE = "base"
    LG = "lg"
    XL = "xl"
    XL2 = "2xl"
    XL3 = "3xl"
    XL4 = "4xl"
    XL5 = "5xl"


class ShadowSlot(str, Enum):
    NONE = "none"
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"


class MotionSlot(str, Enum):
    """Animation presets: timed curves and spring presets."""

    INSTANT = "instant"
    FAST = "fast"
    NORMAL = "normal"
    SLOW = "slow"
    SLOWER = "slower"
    SNAPPY = "snappy"
    BOUNCY = "bouncy"
    GENTLE = "gentle"


class FontWeight(str, Enum):
    ULTRA_LIGHT = "ultra_light"
    THIN = "thin"
    LIGHT = "light"
    REGULAR = "regular"
    MEDIUM = "medium"
    SEMIBOLD = "semibold"
    BOLD = "bold"
    HEAVY = "heavy"
    BLACK = "black"


class ScaleRatio(str, Enum):
    MINOR_SECOND = "minor_second"
    MAJOR_SECOND = "major_second"
    MINOR_THIRD = "minor_third"
    MAJOR_THIRD = "major_third"
    PERFECT_FOURTH = "perfect_fourth"
    GOLDEN_RATIO = "golden_ratio"


class HarmonyType(str, Enum):
    COMPLEMENTARY = "complementary"
    TRIADIC = "triadic"
    ANALOGOUS = "analogous"
    SPLIT_COMPLEMENTARY = "split-complementary"


class ColorRole(str, Enum):
    """Interactive states derived from a base colour."""

    HOVER = "hover"
    PRESSED = "pressed"
    DISABLED = "disabled"


class TokenCategory(str, Enum):
    COLOR = "color"
    SPACING = "spacing"
    RADIUS = "radius"
    FONT_SIZE = "font_size"
    SHADOW = "shadow"
    MOTION = "motion"


SCALE_RATIOS: dict[ScaleRatio, float] = {
    ScaleRatio.MINOR_SECOND: 1.067,
    ScaleRatio.MAJOR_SECOND: 1.125,
    ScaleRatio.MINOR_THIRD: 1.200,
    ScaleRatio.MAJOR_THIRD: 1.250,
    ScaleRatio.PERFECT_FOURTH: 1.333,
    ScaleRatio.GOLDEN_RATIO: 1.618,
}

FONT_WEIGHTS: dict[FontWeight, int] = {
    FontWeight.ULTRA_LIGHT: 100,
    FontWeight.THIN: 200,
    FontWeight.LIGHT: 300,
    FontWeight.REGULAR: 400,
    FontWeight.MEDIUM: 500,
    FontWeight.SEMIBOLD: 600,
    FontWeight.BOLD: 700,
    FontWeight.HEAVY: 800,
    FontWeight.BLACK: 900,
}

SHADOW_INTENSITY: dict[str, float] = {"subtle": 0.5, "normal": 1.0, "strong": 1.5}

# Font size steps relative to the base size.
_SCALE_STEPS: dict[FontSizeSlot, int] = {
    FontSizeSlot.XS: -2,
    FontSizeSlot.SM: -1,
    FontSizeSlot.BASE: 0,
    FontSizeSlot.LG: 1,
    FontSizeSlot.XL: 2,
    FontSizeSlot.XL2: 3,
    FontSizeSlot.XL3: 4,
    FontSizeSlot.XL4: 5,
    FontSizeSlot.XL5: 6,
}


# =============================================================================
# Token data
# =============================================================================


@dataclass(frozen=True)
class OklchColor:
    """A colour in OKLCH space.

    Attributes:
        l: Lightness, 0-1.
        c: Chroma, 0-0.4.
        h: Hue in degrees, 0-360.
        alpha: Opacity 0-1, or None for fully opaque.
    """

    l: float  # noqa: E741
    c: float
    h: float
    alpha: float | None = None


@dataclass(frozen=True)
class ColorTokens:
    primary: OklchColor
    secondary: OklchColor
    accent: OklchColor
    background: OklchColor
    background_elevated: OklchColor
    surface: OklchColor
    surface_elevated: OklchColor
    text_primary: OklchColor
    text_secondary: OklchColor
    text_tertiary: OklchColor
    text_inverse: OklchColor
    success: OklchColor
    warning: OklchColor
    error: OklchColor
    info: OklchColor
    border: OklchColor
    divider: OklchColor
    shadow: OklchColor
    overlay: OklchColor
    primary_hover: OklchColor
    primary_pressed: OklchColor
    primary_disabled: OklchColor

    def get(self, slot: ColorSlot) -> OklchColor:
        return getattr(self, ColorSlot(slot).value)


@dataclass(frozen=True)
class TypographyTokens:
    base_font_size: float
    scale_ratio: ScaleRatio
    fonts: dict[str, str]
    weights: dict[str, int]
    line_heights: dict[str, float]
    tracking: dict[str, float]
    sizes: dict[str, float]


@dataclass(frozen=True)
class SpacingTokens:
    base_unit: float
    scale: dict[str, float]
    radii: dict[str, float]
    border_widths: dict[str, float]


@dataclass(frozen=True)
class ShadowValue:
    x: float
    y: float
    blur: float
    spread: float
    color: OklchColor


@dataclass(frozen=True)
class ShadowTokens:
    none: ShadowValue
    sm: ShadowValue
    md: ShadowValue
    lg: ShadowValue
    xl: ShadowValue

    def get(self, slot: ShadowSlot) -> ShadowValue:
        return getattr(self, ShadowSlot(slot).value)


@dataclass(frozen=True)
class SpringPreset:
    mass: float
    stiffness: float
    damping: float


@dataclass(frozen=True)
class MotionTokens:
    durations: dict[str, float]  # milliseconds
    easings: dict[str, str]
    springs: dict[str, SpringPreset]


@dataclass(frozen=True)
class DesignTokens:
    """A complete, resolved token set for one generation request."""

    name: str
    style_id: str
    is_dark: bool
    colors: ColorTokens
    typography: TypographyTokens
    spacing: SpacingTokens
    shadows: ShadowTokens
    motion: MotionTokens


@dataclass(frozen=True)
class ContrastResult:
    """Outcome of a contrast repair.

    ``satisfied`` is False when every attempt was used before the
    requested lightness difference was reached; ``color`` is then the best
    candidate seen.
    """

    color: OklchColor
    achieved_delta: float
    satisfied: bool
    attempts: int


@dataclass(frozen=True)
class TokenValue:
    """A design-token reference resolved to a Swift value expression."""

    category: TokenCategory
    slot: str
    expr: str


# =============================================================================
# Colour arithmetic
# =============================================================================


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def create_oklch_color(
    l: float, c: float, h: float, alpha: float | None = None  # noqa: E741
) -> OklchColor:
    return OklchColor(l=l, c=c, h=h, alpha=alpha)


def adjust_lightness(color: OklchColor, delta: float) -> OklchColor:
    """Shift lightness, clamped to 0-1."""
    return replace(color, l=_clamp(color.l + delta, 0.0, 1.0))


def adjust_chroma(color: OklchColor, delta: float) -> OklchColor:
    """Shift chroma, clamped to 0-0.4."""
    return replace(color, c=_clamp(color.c + delta, 0.0, 0.4))


def rotate_hue(color: OklchColor, degrees: float) -> OklchColor:
    """Rotate hue, wrapping into 0-360."""
    return replace(color, h=(color.h + degrees) % 360)


def create_harmony(base: OklchColor, kind: HarmonyType | str) -> list[OklchColor]:
    """Colour-theory harmonies around a base colour."""
    match HarmonyType(kind):
        case HarmonyType.COMPLEMENTARY:
            return [base, rotate_hue(base, 180)]
        case HarmonyType.TRIADIC:
            return [base, rotate_hue(base, 120), rotate_hue(base, 240)]
        case HarmonyType.ANALOGOUS:
            return [rotate_hue(base, -30), base, rotate_hue(base, 30)]
        case HarmonyType.SPLIT_COMPLEMENTARY:
            return [base, rotate_hue(base, 150), rotate_hue(base, 210)]


def generate_lightness_scale(base: OklchColor, steps: int = 10) -> list[OklchColor]:
    """Evenly spaced tints and shades of ``base`` (excluding black and white)."""
    step_size = 1 / (steps + 1)
    return [replace(base, l=step_size * i) for i in range(1, steps + 1)]


def resolve_color(base: OklchColor, role: ColorRole | str) -> OklchColor:
    """Derive an interactive-state colour from ``base``.

    Hover and pressed move lightness toward the middle (darker for light
    colours, lighter for dark ones); disabled desaturates and sets alpha 0.5.
    """
    sign = -1 if base.l > 0.5 else 1
    match ColorRole(role):
        case ColorRole.HOVER:
            return adjust_lightness(base, sign * 0.05)
        case ColorRole.PRESSED:
            return adjust_lightness(base, sign * 0.1)
        case ColorRole.DISABLED:
            return replace(adjust_chroma(base, -0.1), alpha=0.5)


def generate_interactive_states(base: OklchColor) -> dict[ColorRole, OklchColor]:
    return {role: resolve_color(base, role) for role in ColorRole}


# =============================================================================
# Parsing and formatting
# =============================================================================

_OKLCH_PATTERN = re.compile(
    r"oklch\(\s*([0-9.]+)\s+([0-9.]+)\s+([0-9.]+)\s*(?:/\s*([0-9.]+)\s*)?\)"
)
_HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{6}|[0-9a-fA-F]{3})$")


def parse_oklch(value: str) -> OklchColor:
    """Parse ``oklch(L C H)`` or ``oklch(L C H / A)``.

    Raises:
        ValueError: If the string is not a valid OKLCH expression.
    """
    match = _OKLCH_PATTERN.fullmatch(value.strip())
    if not match:
        raise ValueError(f"Invalid OKLCH string: {value}")
    try:
        l, c, h = (float(part) for part in match.group(1, 2, 3))  # noqa: E741
        alpha = float(match.group(4)) if match.group(4) else None
    except ValueError as e:
        raise ValueError(f"Invalid OKLCH string: {value}") from e
    return OklchColor(l=l, c=c, h=h, alpha=alpha)


def parse_hex(value: str) -> OklchColor:
    """Parse ``#rrggbb`` or ``#rgb`` into OKLCH.

    Raises:
        ValueError: If the string is not a hex colour.
    """
    match = _HEX_PATTERN.match(value.strip())
    if not match:
        raise ValueError(f"Invalid hex colour: {value}")
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    rgb = tuple(int(digits[i : i + 2], 16) / 255 for i in (0, 2, 4))
    return srgb_to_oklch(*rgb)


def parse_color(value: "str | OklchColor") -> OklchColor:
    """Accept an ``OklchColor``, an OKLCH string or a hex string."""
    if isinstance(value, OklchColor):
        return value
    if value.strip().startswith("oklch"):
        return parse_oklch(value)
    return parse_hex(value)


def _css_number(value: float) -> str:
    return format(round(value, 4), "g")


def format_oklch_css(color: OklchColor) -> str:
    """Format as a CSS ``oklch()`` expression."""
    body = f"{_css_number(color.l)} {_css_number(color.c)} {_css_number(color.h)}"
    if color.alpha is not None and color.alpha < 1:
        body += f" / {_css_number(color.alpha)}"
    return f"oklch({body})"


def _cbrt(value: float) -> float:
    return math.copysign(abs(value) ** (1 / 3), value)


def _gamma_encode(channel: float) -> float:
    if channel <= 0.0031308:
        return 12.92 * channel
    return 1.055 * channel ** (1 / 2.4) - 0.055


def _gamma_decode(channel: float) -> float:
    if channel <= 0.04045:
        return channel / 12.92
    return ((channel + 0.055) / 1.055) ** 2.4


def oklch_to_srgb(color: OklchColor) -> tuple[float, float, float]:
    """Convert to gamma-encoded sRGB, each channel clamped to 0-1.

    Goes OKLCH -> OKLab -> LMS -> linear sRGB -> sRGB.
    """
    hue = math.radians(color.h)
    a = color.c * math.cos(hue)
    b = color.c * math.sin(hue)

    l_ = color.l + 0.3963377774 * a + 0.2158037573 * b
    m_ = color.l - 0.1055613458 * a - 0.0638541728 * b
    s_ = color.l - 0.0894841775 * a - 1.2914855480 * b
    l, m, s = l_**3, m_**3, s_**3  # noqa: E741

    red = 4.0767416621 * l - 3.3077115913 * m + 0.2309699292 * s
    green = -1.2684380046 * l + 2.6097574011 * m - 0.3413193965 * s
    blue = -0.0041960863 * l - 0.7034186147 * m + 1.7076147010 * s

    return tuple(_clamp(_gamma_encode(ch), 0.0, 1.0) for ch in (red, green, blue))


def srgb_to_oklch(red: float, green: float, blue: float) -> OklchColor:
    """Convert gamma-encoded sRGB channels (0-1) to OKLCH."""
    r, g, b = (_gamma_decode(ch) for ch in (red, green, blue))

    l = _cbrt(0.4122214708 * r + 0.5363325363 * g + 0.0514459929 * b)  # noqa: E741
    m = _cbrt(0.2119034982 * r + 0.6806995451 * g + 0.1073969566 * b)
    s = _cbrt(0.0883024619 * r + 0.2817188376 * g + 0.6299787005 * b)

    lightness = 0.2104542553 * l + 0.7936177850 * m - 0.0040720468 * s
    a = 1.9779984951 * l - 2.4285922050 * m + 0.4505937099 * s
    b_ = 0.0259040371 * l + 0.7827717662 * m - 0.8086757660 * s

    chroma = math.hypot(a, b_)
    hue = math.degrees(math.atan2(b_, a)) % 360 if chroma > 1e-6 else 0.0
    return OklchColor(l=lightness, c=chroma, h=hue)


def format_hex(color: OklchColor) -> str:
    """Format as ``#rrggbb`` (alpha is dropped)."""
    channels = oklch_to_srgb(color)
    return "#" + "".join(f"{round(ch * 255):02x}" for ch in channels)


# =============================================================================
# Palette generation
# =============================================================================


def generate_color_tokens(
    primary: OklchColor,
    accent: OklchColor | None = None,
    is_dark: bool = False,
) -> ColorTokens:
    """Build the full 22-slot palette from a primary colour.

    Accent defaults to the primary pushed 0.05 in chroma and rotated 150
    degrees; secondary is the primary with 0.08 less chroma. Neutral slots are
    tinted with the primary's hue and come from separate light/dark tables.
    Semantic colours are fixed.
    """
    hue = primary.h

    def tint(light: tuple[float, float], dark: tuple[float, float]) -> OklchColor:
        l, c = dark if is_dark else light  # noqa: E741
        return OklchColor(l=l, c=c, h=hue)

    if accent is None:
        accent = rotate_hue(adjust_chroma(primary, 0.05), 150)
    states = generate_interactive_states(primary)

    return ColorTokens(
        primary=primary,
        secondary=adjust_chroma(primary, -0.08),
        accent=accent,
        background=tint((0.98, 0.005), (0.15, 0.02)),
        background_elevated=tint((0.96, 0.005), (0.18, 0.02)),
        surface=tint((0.95, 0.01), (0.20, 0.02)),
        surface_elevated=tint((0.99, 0.005), (0.25, 0.02)),
        text_primary=tint((0.20, 0.02), (0.95, 0.01)),
        text_secondary=tint((0.45, 0.02), (0.70, 0.02)),
        text_tertiary=tint((0.60, 0.01), (0.55, 0.01)),
        text_inverse=tint((0.95, 0.01), (0.15, 0.02)),
        success=OklchColor(0.65, 0.18, 145),
        warning=OklchColor(0.75, 0.18, 85),
        error=OklchColor(0.60, 0.22, 25),
        info=OklchColor(0.65, 0.18, 250),
        border=tint((0.85, 0.01), (0.30, 0.02)),
        divider=tint((0.90, 0.005), (0.25, 0.01)),
        shadow=OklchColor(0.0, 0, 0, 0.15),
        overlay=OklchColor(0.0, 0, 0, 0.6 if is_dark else 0.4),
        primary_hover=states[ColorRole.HOVER],
        primary_pressed=states[ColorRole.PRESSED],
        primary_disabled=states[ColorRole.DISABLED],
    )


# Float tolerance so 0.95 - 0.55 counts as a 0.4 difference.
_CONTRAST_EPSILON = 1e-9


def has_minimum_contrast(
    foreground: OklchColor, background: OklchColor, min_delta: float = 0.4
) -> bool:
    """Lightness-difference contrast check."""
    return abs(foreground.l - background.l) + _CONTRAST_EPSILON >= min_delta


def ensure_contrast(
    foreground: OklchColor,
    background: OklchColor,
    min_delta: float = 0.4,
    max_attempts: int = 10,
) -> ContrastResult:
    """Push ``foreground`` lightness away from ``background`` until it contrasts.

    Lightness moves in 0.05 steps, darker on light backgrounds and lighter on
    dark ones, for at most ``max_attempts`` steps. The returned colour is never
    further from compliance than the input.
    """
    original_delta = abs(foreground.l - background.l)
    if has_minimum_contrast(foreground, background, min_delta):
        return ContrastResult(foreground, original_delta, True, 0)

    direction = -1 if background.l > 0.5 else 1
    best, best_delta = foreground, original_delta
    adjusted = foreground
    attempts = 0

    while attempts < max_attempts:
        adjusted = adjust_lightness(adjusted, direction * 0.05)
        attempts += 1
        delta = abs(adjusted.l - background.l)
        if delta > best_delta:
            best, best_delta = adjusted, delta
        if has_minimum_contrast(adjusted, background, min_delta):
            break

    return ContrastResult(
        color=best,
        achieved_delta=best_delta,
        satisfied=has_minimum_contrast(best, background, min_delta),
        attempts=attempts,
    )


# =============================================================================
# Typography, spacing, shadows, motion
# =============================================================================


def calculate_scale_step(base_size: float, ratio: float, step: int) -> float:
    """Size ``step`` steps along the scale, rounded half-up to 0.5."""
    size = base_size * ratio**step
    return math.floor(size * 2 + 0.5) / 2


def generate_typography_tokens(
    base_font_size: float = 17,
    scale_ratio: ScaleRatio | str = ScaleRatio.MAJOR_SECOND,
    display_font: str = "SF Pro Display",
    body_font: str = "SF Pro Text",
) -> TypographyTokens:
    scale_ratio = ScaleRatio(scale_ratio)
    ratio = SCALE_RATIOS[scale_ratio]
    sizes = {
        slot.value: (
            base_font_size
            if step == 0
            else calculate_scale_step(base_font_size, ratio, step)
        )
        for slot, step in _SCALE_STEPS.items()
    }
    return TypographyTokens(
        base_font_size=base_font_size,
        scale_ratio=scale_ratio,
        fonts={
            "display": display_font,
            "heading": display_font,
            "body": body_font,
            "mono": "SF Mono",
        },
        weights={
            weight.value: FONT_WEIGHTS[weight]
            for weight in (
                FontWeight.LIGHT,
                FontWeight.REGULAR,
                FontWeight.MEDIUM,
                FontWeight.SEMIBOLD,
                FontWeight.BOLD,
                FontWeight.HEAVY,
            )
        },
        line_heights={
            "tight": 1.1,
            "snug": 1.25,
            "normal": 1.4,
            "relaxed": 1.6,
            "loose": 2.0,
        },
        tracking={
            "tighter": -0.05,
            "tight": -0.025,
            "normal": 0,
            "wide": 0.025,
            "wider": 0.05,
            "widest": 0.1,
        },
        sizes=sizes,
    )


def generate_spacing_tokens(base_unit: float = 4) -> SpacingTokens:
    """Spacing scale, radii and border widths on a ``base_unit`` grid."""
    return SpacingTokens(
        base_unit=base_unit,
        scale={slot.value: base_unit * float(slot.value) for slot in SpacingSlot},
        radii={
            RadiusSlot.NONE.value: 0,
            RadiusSlot.SM.value: base_unit,
            RadiusSlot.MD.value: base_unit * 2,
            RadiusSlot.LG.value: base_unit * 3,
            RadiusSlot.XL.value: base_unit * 4,
            RadiusSlot.XL2.value: base_unit * 6,
            RadiusSlot.XL3.value: base_unit * 8,
            RadiusSlot.FULL.value: 9999,
        },
        border_widths={
            "none": 0,
            "thin": 0.5,
            "normal": 1,
            "medium": 2,
            "thick": 4,
        },
    )


def generate_shadow_tokens(
    intensity: str = "normal",
    shadow_color: OklchColor | None = None,
) -> ShadowTokens:
    """Five elevation levels. Intensity scales alpha only, never geometry."""
    if intensity not in SHADOW_INTENSITY:
        raise ValueError(f"Unknown shadow intensity: {intensity}")
    multiplier = SHADOW_INTENSITY[intensity]
    color = shadow_color or OklchColor(0, 0, 0, 0.15)

    def level(y: float, blur: float, spread: float, alpha: float) -> ShadowValue:
        return ShadowValue(
            x=0, y=y, blur=blur, spread=spread, color=replace(color, alpha=alpha)
        )

    return ShadowTokens(
        none=level(0, 0, 0, 0),
        sm=level(1, 2, 0, 0.05 * multiplier),
        md=level(2, 4, -1, 0.1 * multiplier),
        lg=level(4, 8, -2, 0.1 * multiplier),
        xl=level(8, 16, -4, 0.15 * multiplier),
    )


def generate_motion_tokens() -> MotionTokens:
    return MotionTokens(
        durations={
            "instant": 0,
            "fast": 100,
            "normal": 200,
            "slow": 300,
            "slower": 500,
        },
        easings={
            "linear": "linear",
            "ease_in": "cubic-bezier(0.4, 0, 1, 1)",
            "ease_out": "cubic-bezier(0, 0, 0.2, 1)",
            "ease_in_out": "cubic-bezier(0.4, 0, 0.2, 1)",
            "spring": "cubic-bezier(0.5, 1.25, 0.75, 1)",
        },
        springs={
            "snappy": SpringPreset(mass=1, stiffness=400, damping=30),
            "bouncy": SpringPreset(mass=1, stiffness=300, damping=15),
            "gentle": SpringPreset(mass=1, stiffness=150, damping=20),
        },
    )


def generate_design_tokens(
    primary: "OklchColor | str",
    accent: "OklchColor | str | None" = None,
    is_dark: bool = False,
    name: str = "SwiftShip",
    style_id: str = "default",
    base_font_size: float = 17,
    scale_ratio: ScaleRatio | str = ScaleRatio.MAJOR_SECOND,
    display_font: str = "SF Pro Display",
    body_font: str = "SF Pro Text",
    base_unit: float = 4,
    shadow_intensity: str = "normal",
) -> DesignTokens:
    """Assemble a complete token set.

    Colours may be given as ``OklchColor`` or as OKLCH/hex strings.
    """
    primary_color = parse_color(primary)
    accent_color = parse_color(accent) if accent is not None else None
    shadow_color = OklchColor(0, 0, 0, 0.4 if is_dark else 0.15)

    return DesignTokens(
        name=name,
        style_id=style_id,
        is_dark=is_dark,
        colors=generate_color_tokens(primary_color, accent_color, is_dark),
        typography=generate_typography_tokens(
            base_font_size, scale_ratio, display_font, body_font
        ),
        spacing=generate_spacing_tokens(base_unit),
        shadows=generate_shadow_tokens(shadow_intensity, shadow_color),
        motion=generate_motion_tokens(),
    )


def tokens_from_config(config: Any) -> DesignTokens:
    """Derive tokens from an ``AppConfig``'s appearance fields.

    Dark tokens are produced when the app prefers dark appearance or only
    supports dark mode.
    """
    is_dark = bool(config.prefers_dark) or (
        config.supports_dark_mode and not config.supports_light_mode
    )
    intensity = getattr(config.shadow_intensity, "value", config.shadow_intensity)
    return generate_design_tokens(
        primary=config.accent_color,
        is_dark=is_dark,
        name=f"{config.name} {'Dark' if is_dark else 'Light'}",
        base_font_size=config.base_font_size,
        scale_ratio=config.scale_ratio,
        base_unit=config.base_unit,
        shadow_intensity=intensity,
    )


# =============================================================================
# Swift value expressions
# =============================================================================


def swift_number(value: float) -> str:
    """Shortest stable Swift literal for a number (``16``, ``0.5``)."""
    if float(value).is_integer():
        return str(int(value))
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def swift_color(color: OklchColor) -> str:
    """``Color(red:green:blue:)`` expression for an OKLCH colour."""
    red, green, blue = (round(ch, 3) + 0.0 for ch in oklch_to_srgb(color))
    expr = f"Color(red: {red:.3f}, green: {green:.3f}, blue: {blue:.3f}"
    if color.alpha is not None and color.alpha < 1:
        expr += f", opacity: {swift_number(round(color.alpha, 3))}"
    return expr + ")"


def swift_case(value: str) -> str:
    """Snake-case wire value to a Swift enum case (``ultra_light`` -> ``.ultraLight``)."""
    head, *rest = value.split("_")
    return "." + head + "".join(part[:1].upper() + part[1:] for part in rest)


def swift_font_weight(weight: FontWeight | str) -> str:
    return swift_case(FontWeight(weight).value)


def swift_animation(slot: MotionSlot | str, motion: MotionTokens) -> str:
    """Swift ``Animation`` expression for a motion preset."""
    slot = MotionSlot(slot)
    spring = motion.springs.get(slot.value)
    if spring is not None:
        return (
            f".interpolatingSpring(mass: {swift_number(spring.mass)}, "
            f"stiffness: {swift_number(spring.stiffness)}, "
            f"damping: {swift_number(spring.damping)})"
        )
    seconds = motion.durations[slot.value] / 1000
    if seconds == 0:
        return ".linear(duration: 0)"
    return f".easeInOut(duration: {swift_number(seconds)})"


# =============================================================================
# Resolver
# =============================================================================


def _slot(
    enum_type: type[Enum], category: TokenCategory, slot: Any, node_id: str | None
):
    try:
        return enum_type(slot)
    except ValueError as e:
        raise TokenResolutionFailure(category.value, slot, node_id) from e


@dataclass(frozen=True)
class TokenResolver:
    """Maps slot names to Swift value expressions for one token set.

    Unknown slots raise ``TokenResolutionFailure``.
    """

    tokens: DesignTokens

    def color(self, slot: ColorSlot | str, node_id: str | None = None) -> TokenValue:
        slot = _slot(ColorSlot, TokenCategory.COLOR, slot, node_id)
        return TokenValue(
            TokenCategory.COLOR, slot.value, swift_color(self.tokens.colors.get(slot))
        )

    def spacing(self, slot: SpacingSlot | str, node_id: str | None = None) -> TokenValue:
        slot = _slot(SpacingSlot, TokenCategory.SPACING, slot, node_id)
        return TokenValue(
            TokenCategory.SPACING,
            slot.value,
            swift_number(self.tokens.spacing.scale[slot.value]),
        )

    def radius(self, slot: RadiusSlot | str, node_id: str | None = None) -> TokenValue:
        slot = _slot(RadiusSlot, TokenCategory.RADIUS, slot, node_id)
        return TokenValue(
            TokenCategory.RADIUS,
            slot.value,
            swift_number(self.tokens.spacing.radii[slot.value]),
        )

    def font_size(
        self, slot: FontSizeSlot | str, node_id: str | None = None
    ) -> TokenValue:
        """Resolves to a ``.system(size:)`` font expression."""
        slot = _slot(FontSizeSlot, TokenCategory.FONT_SIZE, slot, node_id)
        size = swift_number(self.tokens.typography.sizes[slot.value])
        return TokenValue(TokenCategory.FONT_SIZE, slot.value, f".system(size: {size})")

    def shadow(self, slot: ShadowSlot | str, node_id: str | None = None) -> ShadowValue:
        slot = _slot(ShadowSlot, TokenCategory.SHADOW, slot, node_id)
        return self.tokens.shadows.get(slot)

    def shadow_color(
        self, slot: ShadowSlot | str, node_id: str | None = None
    ) -> TokenValue:
        value = self.shadow(slot, node_id)
        return TokenValue(TokenCategory.SHADOW, ShadowSlot(slot).value, swift_color(value.color))

    def motion(self, slot: MotionSlot | str, node_id: str | None = None) -> TokenValue:
        slot = _slot(MotionSlot, TokenCategory.MOTION, slot, node_id)
        return TokenValue(
            TokenCategory.MOTION, slot.value, swift_animation(slot, self.tokens.motion)
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
