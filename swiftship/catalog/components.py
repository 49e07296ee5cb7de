"""Seed table of component types.

Each component type pairs a ``Props`` schema with a ``ComponentMeta``.
Properties use snake_case keys; enum values are the snake_case spelling of
the corresponding SwiftUI case.
"""

from enum import Enum
from typing import Annotated, Literal

from pydantic import (
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    field_validator,
    model_validator,
)

from swiftship.definition import Action
from swiftship.tokens import (
    ColorSlot,
    FontSizeSlot,
    FontWeight,
    RadiusSlot,
    SpacingSlot,
)

from .lib import (
    BindableProperty,
    ComponentCatalog,
    ComponentCategory,
    ComponentConstraints,
    ComponentMeta,
    Props,
    SpacingRef,
    ValueType,
)

Number = StrictFloat
NonNegative = Annotated[StrictFloat, Field(ge=0)]
Positive = Annotated[StrictFloat, Field(gt=0)]

# =============================================================================
# Prop enums
# =============================================================================


class TextStyle(str, Enum):
    LARGE_TITLE = "large_title"
    TITLE = "title"
    TITLE2 = "title2"
    TITLE3 = "title3"
    HEADLINE = "headline"
    BODY = "body"
    CALLOUT = "callout"
    SUBHEADLINE = "subheadline"
    FOOTNOTE = "footnote"
    CAPTION = "caption"
    CAPTION2 = "caption2"


class HorizontalAlignment(str, Enum):
    LEADING = "leading"
    CENTER = "center"
    TRAILING = "trailing"


class VerticalAlignment(str, Enum):
    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"
    FIRST_TEXT_BASELINE = "first_text_baseline"
    LAST_TEXT_BASELINE = "last_text_baseline"


class StackAlignment(str, Enum):
    TOP_LEADING = "top_leading"
    TOP = "top"
    TOP_TRAILING = "top_trailing"
    LEADING = "leading"
    CENTER = "center"
    TRAILING = "trailing"
    BOTTOM_LEADING = "bottom_leading"
    BOTTOM = "bottom"
    BOTTOM_TRAILING = "bottom_trailing"


class ButtonStyle(str, Enum):
    BORDERED = "bordered"
    BORDERED_PROMINENT = "bordered_prominent"
    BORDERLESS = "borderless"
    PLAIN = "plain"


class ButtonRole(str, Enum):
    NONE = "none"
    CANCEL = "cancel"
    DESTRUCTIVE = "destructive"


class ImageSource(str, Enum):
    SYSTEM = "system"
    ASSET = "asset"
    URL = "url"


class ContentMode(str, Enum):
    FIT = "fit"
    FILL = "fill"


class IconSize(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class RenderingMode(str, Enum):
    MONOCHROME = "monochrome"
    HIERARCHICAL = "hierarchical"
    PALETTE = "palette"
    MULTICOLOR = "multicolor"


class ScrollAxes(str, Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"
    BOTH = "both"


class ListStyle(str, Enum):
    AUTOMATIC = "automatic"
    PLAIN = "plain"
    GROUPED = "grouped"
    INSET_GROUPED = "inset_grouped"
    SIDEBAR = "sidebar"


class KeyboardType(str, Enum):
    DEFAULT = "default"
    NUMBER_PAD = "number_pad"
    DECIMAL_PAD = "decimal_pad"
    EMAIL_ADDRESS = "email_address"
    PHONE_PAD = "phone_pad"
    URL = "url"


class TextContentType(str, Enum):
    NONE = "none"
    NAME = "name"
    USERNAME = "username"
    PASSWORD = "password"
    NEW_PASSWORD = "new_password"
    EMAIL_ADDRESS = "email_address"
    TELEPHONE_NUMBER = "telephone_number"
    ONE_TIME_CODE = "one_time_code"
    POSTAL_CODE = "postal_code"
    URL = "url"


class Autocapitalization(str, Enum):
    NEVER = "never"
    WORDS = "words"
    SENTENCES = "sentences"
    CHARACTERS = "characters"


class PickerStyle(str, Enum):
    AUTOMATIC = "automatic"
    MENU = "menu"
    SEGMENTED = "segmented"
    WHEEL = "wheel"
    INLINE = "inline"


class DateComponents(str, Enum):
    DATE = "date"
    HOUR_AND_MINUTE = "hour_and_minute"
    DATE_AND_TIME = "date_and_time"


class DatePickerStyle(str, Enum):
    COMPACT = "compact"
    WHEEL = "wheel"
    GRAPHICAL = "graphical"


class TitleDisplayMode(str, Enum):
    AUTOMATIC = "automatic"
    INLINE = "inline"
    LARGE = "large"


class TabViewStyle(str, Enum):
    AUTOMATIC = "automatic"
    PAGE = "page"


class Detent(str, Enum):
    MEDIUM = "medium"
    LARGE = "large"


class DialogRole(str, Enum):
    DEFAULT = "default"
    CANCEL = "cancel"
    DESTRUCTIVE = "destructive"


class TitleVisibility(str, Enum):
    AUTOMATIC = "automatic"
    VISIBLE = "visible"
    HIDDEN = "hidden"


class ToolbarPlacement(str, Enum):
    AUTOMATIC = "automatic"
    PRIMARY_ACTION = "primary_action"
    CONFIRMATION_ACTION = "confirmation_action"
    CANCELLATION_ACTION = "cancellation_action"
    DESTRUCTIVE_ACTION = "destructive_action"
    NAVIGATION = "navigation"
    TOP_BAR_LEADING = "top_bar_leading"
    TOP_BAR_TRAILING = "top_bar_trailing"
    BOTTOM_BAR = "bottom_bar"


class LabelStyle(str, Enum):
    AUTOMATIC = "automatic"
    TITLE_ONLY = "title_only"
    ICON_ONLY = "icon_only"
    TITLE_AND_ICON = "title_and_icon"


class ProgressStyle(str, Enum):
    AUTOMATIC = "automatic"
    LINEAR = "linear"
    CIRCULAR = "circular"


# =============================================================================
# Primitives
# =============================================================================


class TextProps(Props):
    content: StrictStr = "Hello, World!"
    font: TextStyle = TextStyle.BODY
    size: FontSizeSlot | None = None
    weight: FontWeight | None = None
    color: ColorSlot | None = None
    alignment: HorizontalAlignment | None = None
    line_limit: Annotated[StrictInt, Field(ge=1)] | None = None


class ButtonProps(Props):
    label: StrictStr = "Button"
    style: ButtonStyle = ButtonStyle.BORDERED_PROMINENT
    role: ButtonRole = ButtonRole.NONE
    icon: StrictStr | None = None
    icon_position: Literal["leading", "trailing"] = "leading"
    tint: ColorSlot | None = None
    is_disabled: StrictBool = False
    is_loading: StrictBool = False
    action: Action | None = None


class ImageProps(Props):
    source: ImageSource = ImageSource.SYSTEM
    name: StrictStr = "photo"
    url: StrictStr | None = None
    content_mode: ContentMode = ContentMode.FIT
    corner_radius: RadiusSlot = RadiusSlot.NONE
    width: NonNegative | None = None
    height: NonNegative | None = None

    @field_validator("url")
    @classmethod
    def _absolute(cls, value: str | None) -> str | None:
        if value is not None and not value.startswith(("https://", "http://")):
            raise ValueError("must be an http(s) URL")
        return value

    @model_validator(mode="after")
    def _url_source_has_url(self) -> "ImageProps":
        if self.source == ImageSource.URL and self.url is None:
            raise ValueError("url is required when source is 'url'")
        return self


class IconProps(Props):
    name: StrictStr = "star"
    size: IconSize = IconSize.MEDIUM
    weight: FontWeight = FontWeight.REGULAR
    color: ColorSlot | None = None
    rendering_mode: RenderingMode = RenderingMode.MONOCHROME


class SpacerProps(Props):
    min_length: NonNegative | None = None


class DividerProps(Props):
    pass


# =============================================================================
# Layout
# =============================================================================


class VStackProps(Props):
    alignment: HorizontalAlignment = HorizontalAlignment.CENTER
    spacing: SpacingRef = SpacingSlot.S2


class HStackProps(Props):
    alignment: VerticalAlignment = VerticalAlignment.CENTER
    spacing: SpacingRef = SpacingSlot.S2


class ZStackProps(Props):
    alignment: StackAlignment = StackAlignment.CENTER


class ScrollViewProps(Props):
    axes: ScrollAxes = ScrollAxes.VERTICAL
    shows_indicators: StrictBool = True


class ListProps(Props):
    style: ListStyle = ListStyle.AUTOMATIC
    shows_row_separators: StrictBool = True


class GridProps(Props):
    columns: Annotated[StrictInt, Field(ge=1, le=6)] = 2
    spacing: SpacingRef = SpacingSlot.S2


class SectionProps(Props):
    header: StrictStr | None = None
    footer: StrictStr | None = None


# =============================================================================
# Input
# =============================================================================


class TextFieldProps(Props):
    placeholder: StrictStr = "Enter text..."
    text: StrictStr = ""
    axis: Literal["horizontal", "vertical"] = "horizontal"
    keyboard_type: KeyboardType = KeyboardType.DEFAULT
    text_content_type: TextContentType = TextContentType.NONE
    autocapitalization: Autocapitalization = Autocapitalization.SENTENCES
    autocorrection: StrictBool = True


class SecureFieldProps(Props):
    placeholder: StrictStr = "Password"
    text: StrictStr = ""
    text_content_type: Literal["password", "new_password"] = "password"


class TextEditorProps(Props):
    text: StrictStr = ""
    min_height: NonNegative = 100


class ToggleProps(Props):
    label: StrictStr = "Toggle"
    is_on: StrictBool = False


class PickerOption(Props):
    label: StrictStr
    value: StrictStr


class PickerProps(Props):
    label: StrictStr = "Select"
    options: list[PickerOption] = Field(default_factory=list)
    selection: StrictStr | None = None
    style: PickerStyle = PickerStyle.AUTOMATIC

    @field_validator("selection")
    @classmethod
    def _known_option(cls, value, info):
        options = info.data.get("options") or []
        if value is not None and value not in {option.value for option in options}:
            raise ValueError(f"'{value}' is not one of the option values")
        return value


class DatePickerProps(Props):
    label: StrictStr = "Date"
    components: DateComponents = DateComponents.DATE
    style: DatePickerStyle = DatePickerStyle.COMPACT


class SliderProps(Props):
    label: StrictStr | None = None
    value: Number = 0
    min_value: Number = 0
    max_value: Number = 100
    step: Positive | None = None

    @field_validator("max_value")
    @classmethod
    def _ordered(cls, value, info):
        minimum = info.data.get("min_value")
        if minimum is not None and value <= minimum:
            raise ValueError("must be greater than min_value")
        return value


class StepperProps(Props):
    label: StrictStr = "Value"
    value: StrictInt = 0
    min_value: StrictInt | None = None
    max_value: StrictInt | None = None
    step: Annotated[StrictInt, Field(ge=1)] = 1

    @field_validator("max_value")
    @classmethod
    def _ordered(cls, value, info):
        minimum = info.data.get("min_value")
        if value is not None and minimum is not None and value <= minimum:
            raise ValueError("must be greater than min_value")
        return value


# =============================================================================
# Navigation
# =============================================================================


class NavigationStackProps(Props):
    title: StrictStr | None = None
    title_display_mode: TitleDisplayMode = TitleDisplayMode.AUTOMATIC


class NavigationLinkProps(Props):
    destination: Annotated[StrictStr, Field(min_length=1)]
    label: StrictStr = "Open"


class TabItem(Props):
    screen: Annotated[StrictStr, Field(min_length=1)]
    title: StrictStr
    icon: StrictStr
    badge: Annotated[StrictInt, Field(ge=0)] | None = None


class TabViewProps(Props):
    tabs: list[TabItem] = Field(default_factory=list)
    style: TabViewStyle = TabViewStyle.AUTOMATIC


class SheetProps(Props):
    destination: Annotated[StrictStr, Field(min_length=1)] | None = None
    trigger_label: StrictStr = "Show"
    detents: list[Detent] = Field(default_factory=lambda: [Detent.LARGE])
    shows_drag_indicator: StrictBool = True
    is_interactive_dismiss_disabled: StrictBool = False


class FullScreenCoverProps(Props):
    destination: Annotated[StrictStr, Field(min_length=1)] | None = None
    trigger_label: StrictStr = "Show"
    is_interactive_dismiss_disabled: StrictBool = False


class DialogAction(Props):
    label: StrictStr
    role: DialogRole = DialogRole.DEFAULT
    action: Action | None = None


class AlertProps(Props):
    title: StrictStr = "Alert"
    message: StrictStr | None = None
    trigger_label: StrictStr = "Show Alert"
    actions: list[DialogAction] = Field(default_factory=list)


class ConfirmationDialogProps(Props):
    title: StrictStr = "Confirm"
    message: StrictStr | None = None
    title_visibility: TitleVisibility = TitleVisibility.AUTOMATIC
    trigger_label: StrictStr = "Options"
    actions: list[DialogAction] = Field(default_factory=list)


class MenuItem(Props):
    label: StrictStr
    icon: StrictStr | None = None
    role: Literal["default", "destructive"] = "default"
    action: Action | None = None


class MenuProps(Props):
    label: StrictStr = "Menu"
    icon: StrictStr | None = None
    items: list[MenuItem] = Field(default_factory=list)


class ToolbarProps(Props):
    placement: ToolbarPlacement = ToolbarPlacement.AUTOMATIC


# =============================================================================
# Display, feedback, patterns
# =============================================================================


class LabelProps(Props):
    title: StrictStr = "Label"
    icon: StrictStr = "star"
    style: LabelStyle = LabelStyle.AUTOMATIC


class ProgressViewProps(Props):
    label: StrictStr | None = None
    value: NonNegative | None = None
    total: Positive = 1.0
    style: ProgressStyle = ProgressStyle.AUTOMATIC


class EmptyStateProps(Props):
    title: StrictStr = "No Content"
    icon: StrictStr = "tray"
    message: StrictStr | None = None


# =============================================================================
# Metadata table
# =============================================================================

_LEAF = ComponentConstraints(can_have_children=False, max_children=0)
_CONTAINER = ComponentConstraints()


def _text(*names: str) -> tuple[BindableProperty, ...]:
    return tuple(BindableProperty(name, ValueType.STRING) for name in names)


_PRESENTED = BindableProperty("is_presented", ValueType.BOOL, two_way=True)

SEED_COMPONENTS: tuple[ComponentMeta, ...] = (
    # === PRIMITIVES ===
    ComponentMeta(
        type="text",
        name="Text",
        category=ComponentCategory.PRIMITIVES,
        description="Displays one or more lines of text",
        icon="textformat",
        props_schema=TextProps,
        constraints=_LEAF,
        bindable=_text("content"),
    ),
    ComponentMeta(
        type="button",
        name="Button",
        category=ComponentCategory.PRIMITIVES,
        description="A tappable control that performs an action",
        icon="hand.tap",
        props_schema=ButtonProps,
        constraints=_LEAF,
        bindable=(*_text("label"), BindableProperty("is_disabled", ValueType.BOOL)),
    ),
    ComponentMeta(
        type="image",
        name="Image",
        category=ComponentCategory.PRIMITIVES,
        description="Displays an SF Symbol, asset or remote image",
        icon="photo",
        props_schema=ImageProps,
        constraints=_LEAF,
        bindable=_text("name"),
    ),
    ComponentMeta(
        type="icon",
        name="Image",
        category=ComponentCategory.PRIMITIVES,
        description="Displays an SF Symbol icon",
        icon="star",
        props_schema=IconProps,
        constraints=_LEAF,
        bindable=_text("name"),
    ),
    ComponentMeta(
        type="spacer",
        name="Spacer",
        category=ComponentCategory.PRIMITIVES,
        description="A flexible space that expands along the major axis",
        icon="arrow.left.and.right",
        props_schema=SpacerProps,
        constraints=_LEAF,
    ),
    ComponentMeta(
        type="divider",
        name="Divider",
        category=ComponentCategory.PRIMITIVES,
        description="A visual separator between content",
        icon="minus",
        props_schema=DividerProps,
        constraints=_LEAF,
    ),
    # === LAYOUT ===
    ComponentMeta(
        type="vstack",
        name="VStack",
        category=ComponentCategory.LAYOUT,
        description="A vertical stack of views",
        icon="rectangle.split.1x2",
        props_schema=VStackProps,
    ),
    ComponentMeta(
        type="hstack",
        name="HStack",
        category=ComponentCategory.LAYOUT,
        description="A horizontal stack of views",
        icon="rectangle.split.2x1",
        props_schema=HStackProps,
    ),
    ComponentMeta(
        type="zstack",
        name="ZStack",
        category=ComponentCategory.LAYOUT,
        description="Overlays its children on top of each other",
        icon="square.stack",
        props_schema=ZStackProps,
    ),
    ComponentMeta(
        type="scrollview",
        name="ScrollView",
        category=ComponentCategory.LAYOUT,
        description="A scrollable container",
        icon="scroll",
        props_schema=ScrollViewProps,
    ),
    ComponentMeta(
        type="list",
        name="List",
        category=ComponentCategory.LAYOUT,
        description="A scrollable list of rows",
        icon="list.bullet",
        props_schema=ListProps,
    ),
    ComponentMeta(
        type="grid",
        name="LazyVGrid",
        category=ComponentCategory.LAYOUT,
        description="A grid layout with flexible columns",
        icon="square.grid.2x2",
        props_schema=GridProps,
    ),
    ComponentMeta(
        type="section",
        name="Section",
        category=ComponentCategory.LAYOUT,
        description="A group of rows with optional header and footer",
        icon="rectangle.split.1x2",
        props_schema=SectionProps,
        bindable=_text("header", "footer"),
    ),
    # === INPUT ===
    ComponentMeta(
        type="textfield",
        name="TextField",
        category=ComponentCategory.INPUT,
        description="A single-line text input",
        icon="character.cursor.ibeam",
        props_schema=TextFieldProps,
        constraints=_LEAF,
        bindable=(BindableProperty("text", ValueType.STRING, two_way=True),),
    ),
    ComponentMeta(
        type="securefield",
        name="SecureField",
        category=ComponentCategory.INPUT,
        description="A password input that hides its content",
        icon="eye.slash",
        props_schema=SecureFieldProps,
        constraints=_LEAF,
        bindable=(BindableProperty("text", ValueType.STRING, two_way=True),),
    ),
    ComponentMeta(
        type="texteditor",
        name="TextEditor",
        category=ComponentCategory.INPUT,
        description="A multi-line text input",
        icon="text.alignleft",
        props_schema=TextEditorProps,
        constraints=_LEAF,
        bindable=(BindableProperty("text", ValueType.STRING, two_way=True),),
    ),
    ComponentMeta(
        type="toggle",
        name="Toggle",
        category=ComponentCategory.INPUT,
        description="A switch for binary choices",
        icon="switch.2",
        props_schema=ToggleProps,
        constraints=_LEAF,
        bindable=(
            BindableProperty("is_on", ValueType.BOOL, two_way=True),
            *_text("label"),
        ),
    ),
    ComponentMeta(
        type="picker",
        name="Picker",
        category=ComponentCategory.INPUT,
        description="A control for selecting from a list of options",
        icon="chevron.up.chevron.down",
        props_schema=PickerProps,
        constraints=_LEAF,
        bindable=(BindableProperty("selection", ValueType.STRING, two_way=True),),
    ),
    ComponentMeta(
        type="datepicker",
        name="DatePicker",
        category=ComponentCategory.INPUT,
        description="A control for selecting dates and times",
        icon="calendar",
        props_schema=DatePickerProps,
        constraints=_LEAF,
        bindable=(BindableProperty("selection", ValueType.DATE, two_way=True),),
    ),
    ComponentMeta(
        type="slider",
        name="Slider",
        category=ComponentCategory.INPUT,
        description="A control for selecting a value from a range",
        icon="slider.horizontal.3",
        props_schema=SliderProps,
        constraints=_LEAF,
        bindable=(BindableProperty("value", ValueType.DOUBLE, two_way=True),),
    ),
    ComponentMeta(
        type="stepper",
        name="Stepper",
        category=ComponentCategory.INPUT,
        description="A control for incrementing and decrementing a value",
        icon="plus.forwardslash.minus",
        props_schema=StepperProps,
        constraints=_LEAF,
        bindable=(BindableProperty("value", ValueType.INT, two_way=True),),
    ),
    # === NAVIGATION ===
    ComponentMeta(
        type="navigationstack",
        name="NavigationStack",
        category=ComponentCategory.NAVIGATION,
        description="A container for navigation with a title bar",
        icon="arrow.right.square",
        props_schema=NavigationStackProps,
        bindable=_text("title"),
    ),
    ComponentMeta(
        type="navigationlink",
        name="NavigationLink",
        category=ComponentCategory.NAVIGATION,
        description="A link that pushes a screen onto the navigation stack",
        icon="arrow.right",
        props_schema=NavigationLinkProps,
        bindable=_text("label"),
        sample_props={"destination": "detail"},
    ),
    ComponentMeta(
        type="tabview",
        name="TabView",
        category=ComponentCategory.NAVIGATION,
        description="A container with a tab bar for switching between screens",
        icon="square.fill.on.square.fill",
        props_schema=TabViewProps,
        constraints=_LEAF,
    ),
    ComponentMeta(
        type="sheet",
        name="Sheet",
        category=ComponentCategory.NAVIGATION,
        description="A modal sheet that slides up from the bottom",
        icon="rectangle.bottomhalf.inset.filled",
        props_schema=SheetProps,
        bindable=(_PRESENTED,),
    ),
    ComponentMeta(
        type="fullscreencover",
        name="FullScreenCover",
        category=ComponentCategory.NAVIGATION,
        description="A full-screen modal presentation",
        icon="rectangle.fill",
        props_schema=FullScreenCoverProps,
        bindable=(_PRESENTED,),
    ),
    ComponentMeta(
        type="alert",
        name="Alert",
        category=ComponentCategory.NAVIGATION,
        description="A modal alert dialog",
        icon="exclamationmark.triangle",
        props_schema=AlertProps,
        constraints=_LEAF,
        bindable=(_PRESENTED, *_text("message")),
    ),
    ComponentMeta(
        type="confirmationdialog",
        name="ConfirmationDialog",
        category=ComponentCategory.NAVIGATION,
        description="An action sheet with multiple options",
        icon="questionmark.circle",
        props_schema=ConfirmationDialogProps,
        constraints=_LEAF,
        bindable=(_PRESENTED,),
    ),
    ComponentMeta(
        type="menu",
        name="Menu",
        category=ComponentCategory.NAVIGATION,
        description="A contextual menu of actions",
        icon="ellipsis.circle",
        props_schema=MenuProps,
        constraints=_LEAF,
    ),
    ComponentMeta(
        type="toolbar",
        name="Toolbar",
        category=ComponentCategory.NAVIGATION,
        description="Items placed in the navigation bar or bottom bar",
        icon="menubar.rectangle",
        props_schema=ToolbarProps,
        constraints=ComponentConstraints(max_children=5, requires_parent=True),
    ),
    # === DATA DISPLAY / FEEDBACK / PATTERNS ===
    ComponentMeta(
        type="label",
        name="Label",
        category=ComponentCategory.DATA_DISPLAY,
        description="A title paired with an SF Symbol",
        icon="tag",
        props_schema=LabelProps,
        constraints=_LEAF,
        bindable=_text("title", "icon"),
    ),
    ComponentMeta(
        type="progressview",
        name="ProgressView",
        category=ComponentCategory.FEEDBACK,
        description="A determinate or indeterminate progress indicator",
        icon="hourglass",
        props_schema=ProgressViewProps,
        constraints=_LEAF,
        bindable=(BindableProperty("value", ValueType.DOUBLE), *_text("label")),
    ),
    ComponentMeta(
        type="emptystate",
        name="ContentUnavailableView",
        category=ComponentCategory.PATTERNS,
        description="A placeholder for screens without content",
        icon="tray",
        props_schema=EmptyStateProps,
        constraints=ComponentConstraints(max_children=3),
        bindable=_text("title", "message"),
    ),
)


def build_default_catalog() -> ComponentCatalog:
    """Create the frozen, process-wide default catalog."""
    return ComponentCatalog(SEED_COMPONENTS).freeze()


CATALOG = build_default_catalog()


__all__ = [
    "SEED_COMPONENTS",
    "CATALOG",
    "build_default_catalog",
    # Enums
    "TextStyle",
    "HorizontalAlignment",
    "VerticalAlignment",
    "StackAlignment",
    "ButtonStyle",
    "ButtonRole",
    "ImageSource",
    "ContentMode",
    "IconSize",
    "RenderingMode",
    "ScrollAxes",
    "ListStyle",
    "KeyboardType",
    "TextContentType",
    "Autocapitalization",
    "PickerStyle",
    "DateComponents",
    "DatePickerStyle",
    "TitleDisplayMode",
    "TabViewStyle",
    "Detent",
    "DialogRole",
    "TitleVisibility",
    "ToolbarPlacement",
    "LabelStyle",
    "ProgressStyle",
]
