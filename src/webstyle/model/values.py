"""Scalar vocabularies: closed sets of style values with one canonical form."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, IntEnum, StrEnum
from typing import TypeVar

E = TypeVar("E", bound=Enum)

_INT_RE = re.compile(r"-?\d+")


class Vocabulary(StrEnum):
    """Base for closed vocabularies.

    Every member maps to exactly one canonical string, the text that appears
    inside generated class tokens.
    """

    def canonical(self) -> str:
        return self.value


def lookup(enum_cls: type[E], text: str) -> E | None:
    """Find a member of *enum_cls* by canonical value or by member name.

    ``"2xl"``, ``"xl2"`` and ``"XL2"`` all resolve to ``TextSize.XL2``.
    Returns None when nothing matches.
    """
    try:
        return enum_cls(text)
    except ValueError:
        pass
    if isinstance(text, str):
        key = text.strip().upper().replace("-", "_")
        if key in enum_cls.__members__:
            return enum_cls.__members__[key]
    return None


def render(value: object) -> str:
    """Return the canonical text of any scalar style value.

    Vocabulary members, colors and sizing helpers render through their own
    ``canonical()``; integral floats drop the trailing ``.0``; everything else
    is passed through ``str`` verbatim.
    """
    canonical = getattr(value, "canonical", None)
    if callable(canonical):
        return canonical()
    if isinstance(value, IntEnum):
        return str(int(value))
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


# ---------------------------------------------------------------------------
# Edges, axes, sides
# ---------------------------------------------------------------------------


class Edge(Vocabulary):
    """Edge selector for spacing, borders and insets."""

    ALL = ""
    TOP = "t"
    LEADING = "l"
    TRAILING = "r"
    BOTTOM = "b"
    HORIZONTAL = "x"
    VERTICAL = "y"


class Axis(Vocabulary):
    HORIZONTAL = "x"
    VERTICAL = "y"
    BOTH = ""


class RadiusSide(Vocabulary):
    """Corner or side selector for border radius."""

    ALL = ""
    TOP = "t"
    RIGHT = "r"
    BOTTOM = "b"
    LEFT = "l"
    TOP_LEFT = "tl"
    TOP_RIGHT = "tr"
    BOTTOM_LEFT = "bl"
    BOTTOM_RIGHT = "br"


# ---------------------------------------------------------------------------
# Borders and effects
# ---------------------------------------------------------------------------


class RadiusSize(Vocabulary):
    NONE = "none"
    XS = "xs"
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"
    XL2 = "2xl"
    XL3 = "3xl"
    FULL = "full"


class BorderStyle(Vocabulary):
    SOLID = "solid"
    DASHED = "dashed"
    DOTTED = "dotted"
    DOUBLE = "double"
    HIDDEN = "hidden"
    NONE = "none"
    DIVIDE = "divide"  # divider between children, not a border


class ShadowSize(Vocabulary):
    NONE = "none"
    XS2 = "2xs"
    XS = "xs"
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"
    XL2 = "2xl"


# ---------------------------------------------------------------------------
# Typography
# ---------------------------------------------------------------------------


class TextSize(Vocabulary):
    XS = "xs"
    SM = "sm"
    BASE = "base"
    LG = "lg"
    XL = "xl"
    XL2 = "2xl"
    XL3 = "3xl"
    XL4 = "4xl"
    XL5 = "5xl"
    XL6 = "6xl"
    XL7 = "7xl"
    XL8 = "8xl"
    XL9 = "9xl"


class Weight(Vocabulary):
    THIN = "thin"
    EXTRALIGHT = "extralight"
    LIGHT = "light"
    NORMAL = "normal"
    MEDIUM = "medium"
    SEMIBOLD = "semibold"
    BOLD = "bold"
    EXTRABOLD = "extrabold"
    BLACK = "black"


class Alignment(Vocabulary):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class Tracking(Vocabulary):
    TIGHTER = "tighter"
    TIGHT = "tight"
    NORMAL = "normal"
    WIDE = "wide"
    WIDER = "wider"
    WIDEST = "widest"


class Leading(Vocabulary):
    TIGHTEST = "tightest"
    TIGHTER = "tighter"
    TIGHT = "tight"
    NORMAL = "normal"
    RELAXED = "relaxed"
    LOOSE = "loose"


class Decoration(Vocabulary):
    """Text decoration; the canonical form is the full class token."""

    UNDERLINE = "underline"
    OVERLINE = "overline"
    LINE_THROUGH = "line-through"
    DOUBLE = "double"
    DOTTED = "dotted"
    DASHED = "dashed"
    WAVY = "wavy"
    NONE = "no-underline"


class Wrapping(Vocabulary):
    BALANCE = "balance"
    PRETTY = "pretty"
    WRAP = "wrap"
    NOWRAP = "nowrap"


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------


class Direction(Vocabulary):
    ROW = "row"
    COLUMN = "col"
    ROW_REVERSE = "row-reverse"
    COL_REVERSE = "col-reverse"


class Justify(Vocabulary):
    START = "start"
    END = "end"
    CENTER = "center"
    BETWEEN = "between"
    AROUND = "around"
    EVENLY = "evenly"


class Align(Vocabulary):
    START = "start"
    END = "end"
    CENTER = "center"
    BASELINE = "baseline"
    STRETCH = "stretch"


class Grow(Vocabulary):
    ZERO = "0"
    ONE = "1"


class GridFlow(Vocabulary):
    ROW = "row"
    COL = "col"
    ROW_DENSE = "row-dense"
    COL_DENSE = "col-dense"


class PositionType(Vocabulary):
    STATIC = "static"
    RELATIVE = "relative"
    ABSOLUTE = "absolute"
    FIXED = "fixed"
    STICKY = "sticky"


class DisplayType(Vocabulary):
    NONE = "none"
    BLOCK = "block"
    INLINE = "inline"
    INLINE_BLOCK = "inline-block"
    FLEX = "flex"
    INLINE_FLEX = "inline-flex"
    GRID = "grid"
    INLINE_GRID = "inline-grid"
    TABLE = "table"
    TABLE_CELL = "table-cell"
    TABLE_ROW = "table-row"


class OverflowType(Vocabulary):
    AUTO = "auto"
    HIDDEN = "hidden"
    VISIBLE = "visible"
    SCROLL = "scroll"


# ---------------------------------------------------------------------------
# Motion and interaction
# ---------------------------------------------------------------------------


class TransitionProperty(Vocabulary):
    ALL = "all"
    COLORS = "colors"
    OPACITY = "opacity"
    SHADOW = "shadow"
    TRANSFORM = "transform"


class Easing(Vocabulary):
    LINEAR = "linear"
    IN = "in"
    OUT = "out"
    IN_OUT = "in-out"


class CursorType(Vocabulary):
    AUTO = "auto"
    DEFAULT = "default"
    POINTER = "pointer"
    WAIT = "wait"
    TEXT = "text"
    MOVE = "move"
    NOT_ALLOWED = "not-allowed"


class AnimationName(Vocabulary):
    """Built-in animation names. Any other string is passed through as a custom name."""

    FADE_IN = "fade-in"
    FADE_OUT = "fade-out"
    SLIDE_UP = "slide-up"
    SLIDE_DOWN = "slide-down"
    SLIDE_LEFT = "slide-left"
    SLIDE_RIGHT = "slide-right"
    SCALE_UP = "scale-up"
    SCALE_DOWN = "scale-down"
    BOUNCE = "bounce"
    PULSE = "pulse"
    SPIN = "spin"
    PING = "ping"


class AnimationTiming(Vocabulary):
    LINEAR = "linear"
    EASE_IN = "ease-in"
    EASE_OUT = "ease-out"
    EASE_IN_OUT = "ease-in-out"


class AnimationDirection(Vocabulary):
    NORMAL = "normal"
    REVERSE = "reverse"
    ALTERNATE = "alternate"
    ALTERNATE_REVERSE = "alternate-reverse"


class AnimationFillMode(Vocabulary):
    NONE = "none"
    FORWARDS = "forwards"
    BACKWARDS = "backwards"
    BOTH = "both"


class AnimationPlayState(Vocabulary):
    RUNNING = "running"
    PAUSED = "paused"


# ---------------------------------------------------------------------------
# Scrolling
# ---------------------------------------------------------------------------


class ScrollBehavior(Vocabulary):
    SMOOTH = "smooth"
    AUTO = "auto"


class SnapAlign(Vocabulary):
    START = "start"
    END = "end"
    CENTER = "center"


class SnapStop(Vocabulary):
    NORMAL = "normal"
    ALWAYS = "always"


class SnapType(Vocabulary):
    X = "x"
    Y = "y"
    BOTH = "both"
    MANDATORY = "mandatory"
    PROXIMITY = "proximity"


# ---------------------------------------------------------------------------
# Sizing values
# ---------------------------------------------------------------------------


class SizeKeyword(Vocabulary):
    AUTO = "auto"
    PX = "px"
    FULL = "full"
    SCREEN = "screen"
    DVW = "dvw"
    LVW = "lvw"
    SVW = "svw"
    DVH = "dvh"
    LVH = "lvh"
    SVH = "svh"
    MIN = "min"
    MAX = "max"
    FIT = "fit"


class ContainerSize(Vocabulary):
    XS3 = "3xs"
    XS2 = "2xs"
    XS = "xs"
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"
    XL2 = "2xl"
    XL3 = "3xl"
    XL4 = "4xl"
    XL5 = "5xl"
    XL6 = "6xl"
    XL7 = "7xl"


@dataclass(frozen=True)
class Fraction:
    """A fractional size such as ``1/2``."""

    numerator: int
    denominator: int

    def canonical(self) -> str:
        return f"{self.numerator}/{self.denominator}"


@dataclass(frozen=True)
class Characters:
    """A size measured in character widths, rendered ``[<n>ch]``."""

    count: int

    def canonical(self) -> str:
        return f"[{self.count}ch]"


@dataclass(frozen=True)
class Arbitrary:
    """A raw stylesheet literal, rendered in brackets and never checked."""

    text: str

    def canonical(self) -> str:
        return f"[{self.text}]"


SizeValue = int | SizeKeyword | ContainerSize | Fraction | Characters | Arbitrary | str


def parse_size(text: str) -> SizeValue:
    """Read a sizing value from its textual form.

    Accepts spacing integers (``4``), fractions (``1/2``), character widths
    (``60ch``), bracketed literals (``[17rem]``) and the keyword and container
    vocabularies. Anything else is returned unchanged.
    """
    text = text.strip()
    if _INT_RE.fullmatch(text):
        return int(text)
    if text.startswith("[") and text.endswith("]"):
        return Arbitrary(text[1:-1])
    numerator, slash, denominator = text.partition("/")
    if slash and numerator.isdigit() and denominator.isdigit():
        return Fraction(int(numerator), int(denominator))
    if text.endswith("ch") and text[:-2].isdigit():
        return Characters(int(text[:-2]))
    keyword = lookup(SizeKeyword, text)
    if keyword is not None:
        return keyword
    container = lookup(ContainerSize, text)
    if container is not None:
        return container
    return text


# ---------------------------------------------------------------------------
# Shades
# ---------------------------------------------------------------------------


class Shade(IntEnum):
    """Color intensity from lightest (50) to darkest (950)."""

    S50 = 50
    S100 = 100
    S200 = 200
    S300 = 300
    S400 = 400
    S500 = 500
    S600 = 600
    S700 = 700
    S800 = 800
    S900 = 900
    S950 = 950

    def canonical(self) -> str:
        return str(self.value)
