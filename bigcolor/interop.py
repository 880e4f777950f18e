"""
RGBA8 adapters for handing colors to graphics code.

``RGBA8`` is the exchange type: four bytes, sRGB, straight alpha. Any
object exposing ``r``, ``g``, ``b``, ``a`` byte attributes, or a 4-item
sequence, is accepted on the way in.
"""

from typing import Any, NamedTuple

from .color import BigColor
from .conversion import to_byte


class RGBA8(NamedTuple):
    r: int
    g: int
    b: int
    a: int


def to_rgba8(color: BigColor) -> RGBA8:
    rgb = color.to_rgb()
    return RGBA8(rgb.r, rgb.g, rgb.b, to_byte(rgb.a))


def from_rgba8(rgba) -> BigColor:
    r, g, b, a = rgba
    return BigColor.from_rgba8(r, g, b, a)


def to_external_color(color: BigColor) -> RGBA8:
    return to_rgba8(color)


def from_external_color(obj: Any) -> BigColor:
    """Build a color from an object with byte ``r, g, b, a`` or a 4-tuple."""
    if all(hasattr(obj, ch) for ch in ("r", "g", "b", "a")):
        return BigColor.from_rgba8(obj.r, obj.g, obj.b, obj.a)
    try:
        r, g, b, a = obj
    except (TypeError, ValueError) as e:
        raise TypeError(f"Cannot read RGBA8 channels from {type(obj).__name__}") from e
    return BigColor.from_rgba8(r, g, b, a)


def get_external_color(text: str) -> RGBA8:
    """Lenient: unparsable text gives opaque black."""
    return to_external_color(BigColor(text))
