"""Color values: a hue, a shade where the hue needs one, and an optional opacity.

The three shapes are separate dataclasses so that a named hue cannot be built
without a shade: ``ShadeColor`` takes the shade as a required positional
field, ``MonoColor`` (white, black) has no shade at all, and ``CustomColor``
carries a raw literal.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from webstyle.model.values import Shade, Vocabulary, lookup


class Hue(Vocabulary):
    """Named palette hues that come in the 50-950 shade scale."""

    SLATE = "slate"
    GRAY = "gray"
    ZINC = "zinc"
    NEUTRAL = "neutral"
    STONE = "stone"
    RED = "red"
    ORANGE = "orange"
    AMBER = "amber"
    YELLOW = "yellow"
    LIME = "lime"
    GREEN = "green"
    EMERALD = "emerald"
    TEAL = "teal"
    CYAN = "cyan"
    SKY = "sky"
    BLUE = "blue"
    INDIGO = "indigo"
    VIOLET = "violet"
    PURPLE = "purple"
    FUCHSIA = "fuchsia"
    PINK = "pink"
    ROSE = "rose"


class MonoHue(Vocabulary):
    """Achromatic hues that take no shade."""

    WHITE = "white"
    BLACK = "black"


def opacity_suffix(opacity: float | None) -> str:
    """Render ``/<percent>`` for an opacity in [0, 1].

    Values outside the range (and None) produce an empty suffix: they are
    dropped, not rejected.
    """
    if opacity is None or not 0 <= opacity <= 1:
        return ""
    return f"/{round(opacity * 100)}"


@dataclass(frozen=True)
class ShadeColor:
    hue: Hue
    shade: Shade
    opacity: float | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "hue", Hue(self.hue))
        object.__setattr__(self, "shade", Shade(self.shade))

    def canonical(self) -> str:
        return f"{self.hue.value}-{self.shade.value}{opacity_suffix(self.opacity)}"


@dataclass(frozen=True)
class MonoColor:
    hue: MonoHue
    opacity: float | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "hue", MonoHue(self.hue))

    def canonical(self) -> str:
        return f"{self.hue.value}{opacity_suffix(self.opacity)}"


@dataclass(frozen=True)
class CustomColor:
    """An arbitrary color literal (hex, rgb(), a CSS variable...), passed through unchecked."""

    value: str
    opacity: float | None = None

    def canonical(self) -> str:
        return f"[{self.value}]{opacity_suffix(self.opacity)}"


Color = ShadeColor | MonoColor | CustomColor


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


def white(opacity: float | None = None) -> MonoColor:
    return MonoColor(MonoHue.WHITE, opacity)


def black(opacity: float | None = None) -> MonoColor:
    return MonoColor(MonoHue.BLACK, opacity)


def custom(value: str, opacity: float | None = None) -> CustomColor:
    return CustomColor(value, opacity)


def slate(shade: int, opacity: float | None = None) -> ShadeColor:
    return ShadeColor(Hue.SLATE, shade, opacity)


def gray(shade: int, opacity: float | None = None) -> ShadeColor:
    return ShadeColor(Hue.GRAY, shade, opacity)


def zinc(shade: int, opacity: float | None = None) -> ShadeColor:
    return ShadeColor(Hue.ZINC, shade, opacity)


def neutral(shade: int, opacity: float | None = None) -> ShadeColor:
    return ShadeColor(Hue.NEUTRAL, shade, opacity)


def stone(shade: int, opacity: float | None = None) -> ShadeColor:
    return ShadeColor(Hue.STONE, shade, opacity)


def red(shade: int, opacity: float | None = None) -> ShadeColor:
    return ShadeColor(Hue.RED, shade, opacity)


def orange(shade: int, opacity: float | None = None) -> ShadeColor:
    return ShadeColor(Hue.ORANGE, shade, opacity)


def amber(shade: int, opacity: float | None = None) -> ShadeColor:
    return ShadeColor(Hue.AMBER, shade, opacity)


def yellow(shade: int, opacity: float | None = None) -> ShadeColor:
    return ShadeColor(Hue.YELLOW, shade, opacity)


def lime(shade: int, opacity: float | None = None) -> ShadeColor:
    return ShadeColor(Hue.LIME, shade, opacity)


def green(shade: int, opacity: float | None = None) -> ShadeColor:
    return ShadeColor(Hue.GREEN, shade, opacity)


def emerald(shade: int, opacity: float | None = None) -> ShadeColor:
    return ShadeColor(Hue.EMERALD, shade, opacity)


def teal(shade: int, opacity: float | None = None) -> ShadeColor:
    return ShadeColor(Hue.TEAL, shade, opacity)


def cyan(shade: int, opacity: float | None = None) -> ShadeColor:
    return ShadeColor(Hue.CYAN, shade, opacity)


def sky(shade: int, opacity: float | None = None) -> ShadeColor:
    return ShadeColor(Hue.SKY, shade, opacity)


def blue(shade: int, opacity: float | None = None) -> ShadeColor:
    return ShadeColor(Hue.BLUE, shade, opacity)


def indigo(shade: int, opacity: float | None = None) -> ShadeColor:
    return ShadeColor(Hue.INDIGO, shade, opacity)


def violet(shade: int, opacity: float | None = None) -> ShadeColor:
    return ShadeColor(Hue.VIOLET, shade, opacity)


def purple(shade: int, opacity: float | None = None) -> ShadeColor:
    return ShadeColor(Hue.PURPLE, shade, opacity)


def fuchsia(shade: int, opacity: float | None = None) -> ShadeColor:
    return ShadeColor(Hue.FUCHSIA, shade, opacity)


def pink(shade: int, opacity: float | None = None) -> ShadeColor:
    return ShadeColor(Hue.PINK, shade, opacity)


def rose(shade: int, opacity: float | None = None) -> ShadeColor:
    return ShadeColor(Hue.ROSE, shade, opacity)


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

# hue[-shade][/percent]
_COLOR_RE = re.compile(
    r"""
    ^(?P<hue>[a-z]+)
    (?:-(?P<shade>\d+))?
    (?:/(?P<percent>\d+))?$
    """,
    re.VERBOSE,
)


def parse_color(text: str) -> Color:
    """Parse the token form of a color (``blue-500``, ``white/50``, ``[#0ab]/25``).

    Raises ValueError for text that names no known hue or shade.
    """
    text = text.strip()
    if text.startswith("["):
        literal, _, percent = text.partition("]")
        opacity = _percent(percent.removeprefix("/")) if percent else None
        return CustomColor(literal[1:], opacity)

    match = _COLOR_RE.match(text)
    if match is None:
        raise ValueError(f"Invalid color: {text!r}")
    opacity = _percent(match.group("percent")) if match.group("percent") else None

    mono = lookup(MonoHue, match.group("hue"))
    if mono is not None:
        if match.group("shade"):
            raise ValueError(f"{mono.value} takes no shade: {text!r}")
        return MonoColor(mono, opacity)

    hue = lookup(Hue, match.group("hue"))
    if hue is None:
        raise ValueError(f"Unknown hue in color {text!r}")
    if not match.group("shade"):
        raise ValueError(f"Color {text!r} needs a shade (50-950)")
    return ShadeColor(hue, int(match.group("shade")), opacity)


def _percent(raw: str) -> float:
    if not raw.isdigit():
        raise ValueError(f"Invalid opacity percentage: {raw!r}")
    return int(raw) / 100
