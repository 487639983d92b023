"""webstyle model layer -- public type re-exports."""

from webstyle.model.color import (
    Color,
    CustomColor,
    Hue,
    MonoColor,
    MonoHue,
    ShadeColor,
    parse_color,
)
from webstyle.model.diagnostic import Diagnostic, Severity
from webstyle.model.styles import (
    Animation,
    AspectRatio,
    Background,
    Border,
    BorderInsets,
    Cursor,
    Display,
    EdgeInsets,
    Flex,
    Font,
    Frame,
    Grid,
    Margin,
    MarginInsets,
    Opacity,
    Outline,
    Overflow,
    Padding,
    PaddingInsets,
    Position,
    PositionInsets,
    Radius,
    Ring,
    Scroll,
    Shadow,
    Size,
    Spacing,
    Style,
    Transform,
    Transition,
    Visibility,
    ZIndex,
)
from webstyle.model.values import (
    Align,
    Alignment,
    AnimationDirection,
    AnimationFillMode,
    AnimationName,
    AnimationPlayState,
    AnimationTiming,
    Arbitrary,
    Axis,
    BorderStyle,
    Characters,
    ContainerSize,
    CursorType,
    Decoration,
    Direction,
    DisplayType,
    Easing,
    Edge,
    Fraction,
    GridFlow,
    Grow,
    Justify,
    Leading,
    OverflowType,
    PositionType,
    RadiusSide,
    RadiusSize,
    ScrollBehavior,
    Shade,
    ShadowSize,
    SizeKeyword,
    SnapAlign,
    SnapStop,
    SnapType,
    TextSize,
    Tracking,
    TransitionProperty,
    Vocabulary,
    Weight,
    Wrapping,
)

__all__ = [
    # values
    "Vocabulary",
    "Edge",
    "Axis",
    "RadiusSide",
    "RadiusSize",
    "BorderStyle",
    "ShadowSize",
    "TextSize",
    "Weight",
    "Alignment",
    "Tracking",
    "Leading",
    "Decoration",
    "Wrapping",
    "Direction",
    "Justify",
    "Align",
    "Grow",
    "GridFlow",
    "PositionType",
    "DisplayType",
    "OverflowType",
    "TransitionProperty",
    "Easing",
    "CursorType",
    "AnimationName",
    "AnimationTiming",
    "AnimationDirection",
    "AnimationFillMode",
    "AnimationPlayState",
    "ScrollBehavior",
    "SnapAlign",
    "SnapStop",
    "SnapType",
    "SizeKeyword",
    "ContainerSize",
    "Fraction",
    "Characters",
    "Arbitrary",
    "Shade",
    # color
    "Hue",
    "MonoHue",
    "ShadeColor",
    "MonoColor",
    "CustomColor",
    "Color",
    "parse_color",
    # styles
    "Style",
    "Border",
    "Radius",
    "Background",
    "Opacity",
    "Shadow",
    "Ring",
    "Outline",
    "Font",
    "Frame",
    "Size",
    "AspectRatio",
    "Flex",
    "Grid",
    "Position",
    "Display",
    "Visibility",
    "Overflow",
    "ZIndex",
    "Margin",
    "Padding",
    "EdgeInsets",
    "MarginInsets",
    "PaddingInsets",
    "BorderInsets",
    "PositionInsets",
    "Spacing",
    "Transform",
    "Transition",
    "Animation",
    "Cursor",
    "Scroll",
    # diagnostic
    "Severity",
    "Diagnostic",
]
