"""
Gradients built from color stops, and ``Paint``: either a solid color or
a gradient.
"""

import math
from enum import Enum
from typing import List, Tuple, Union

from pydantic import BaseModel, ConfigDict, field_validator

from .color import BigColor
from .conversion import clamp_01
from .errors import InvalidGradient, UnsupportedConversion

Point = Tuple[float, float]


class GradientType(str, Enum):
    LINEAR = "linear"
    RADIAL = "radial"
    CONIC = "conic"


class GradientExtend(str, Enum):
    """How the gradient continues beyond its first and last stop."""

    PAD = "pad"
    REPEAT = "repeat"
    REFLECT = "reflect"


class ColorStop(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    color: BigColor
    position: float

    @field_validator("position")
    @classmethod
    def _clamp_position(cls, v: float) -> float:
        return clamp_01(v)


class Gradient(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    gradient_type: GradientType
    stops: List[ColorStop]
    start_point: Point = (0.0, 0.0)
    end_point: Point = (1.0, 1.0)
    center: Point = (0.5, 0.5)
    radius: float = 0.5
    angle: float = 0.0
    extend: GradientExtend = GradientExtend.PAD

    @field_validator("stops")
    @classmethod
    def _sort_stops(cls, v: List[ColorStop]) -> List[ColorStop]:
        return sorted(v, key=lambda s: s.position)

    @classmethod
    def linear(
        cls,
        stops: List[ColorStop],
        start_point: Point = (0.0, 0.0),
        end_point: Point = (1.0, 1.0),
        extend: GradientExtend = GradientExtend.PAD,
    ) -> "Gradient":
        return cls(
            gradient_type=GradientType.LINEAR,
            stops=stops,
            start_point=start_point,
            end_point=end_point,
            extend=extend,
        )

    @classmethod
    def radial(
        cls,
        stops: List[ColorStop],
        center: Point = (0.5, 0.5),
        radius: float = 0.5,
        extend: GradientExtend = GradientExtend.PAD,
    ) -> "Gradient":
        return cls(
            gradient_type=GradientType.RADIAL,
            stops=stops,
            center=center,
            radius=radius,
            extend=extend,
        )

    @classmethod
    def conic(
        cls,
        stops: List[ColorStop],
        center: Point = (0.5, 0.5),
        angle: float = 0.0,
        extend: GradientExtend = GradientExtend.PAD,
    ) -> "Gradient":
        return cls(
            gradient_type=GradientType.CONIC,
            stops=stops,
            center=center,
            angle=angle,
            extend=extend,
        )

    def color_at(self, position: float) -> BigColor:
        """
        Interpolate in sRGB between the stops surrounding ``position``.
        Positions outside the stops take the nearest end color; no stops
        give transparent black.
        """
        if not self.stops:
            return BigColor.from_rgb(0, 0, 0, 0.0)

        first, last = self.stops[0], self.stops[-1]
        if len(self.stops) == 1 or position <= first.position:
            return first.color.clone()
        if position >= last.position:
            return last.color.clone()

        lower, upper = first, last
        for a, b in zip(self.stops, self.stops[1:]):
            if a.position <= position <= b.position:
                lower, upper = a, b
                break

        span = upper.position - lower.position
        t = 0.0 if span == 0 else (position - lower.position) / span
        c1, c2 = lower.color.to_rgb(), upper.color.to_rgb()
        return BigColor.from_rgb(
            round(c1.r + (c2.r - c1.r) * t),
            round(c1.g + (c2.g - c1.g) * t),
            round(c1.b + (c2.b - c1.b) * t),
            c1.a + (c2.a - c1.a) * t,
        )

    def complementary(self) -> "Gradient":
        """Same geometry, every stop color rotated 180 degrees in hue."""
        stops = [
            ColorStop(color=s.color.complement(), position=s.position) for s in self.stops
        ]
        return self.model_copy(update={"stops": stops})

    def _stops_css(self) -> str:
        return ", ".join(
            f"{s.color.to_rgb_string()} {int(s.position * 100)}%" for s in self.stops
        )

    def to_css_string(self) -> str:
        if not self.stops:
            return "linear-gradient(transparent, transparent)"

        prefix = "repeating-" if self.extend == GradientExtend.REPEAT else ""
        if self.gradient_type == GradientType.LINEAR:
            dx = self.end_point[0] - self.start_point[0]
            # CSS y axis points down
            dy = self.start_point[1] - self.end_point[1]
            deg = int(math.degrees(math.atan2(dx, dy)))
            return f"{prefix}linear-gradient({deg}deg, {self._stops_css()})"

        cx, cy = int(self.center[0] * 100), int(self.center[1] * 100)
        if self.gradient_type == GradientType.RADIAL:
            return f"{prefix}radial-gradient(circle at {cx}% {cy}%, {self._stops_css()})"
        return (
            f"{prefix}conic-gradient(from {int(self.angle)}deg at {cx}% {cy}%, "
            f"{self._stops_css()})"
        )

    def __str__(self) -> str:
        return self.to_css_string()


class Paint:
    """A solid ``BigColor`` or a ``Gradient``."""

    def __init__(self, value: Union[BigColor, Gradient]):
        self.value = value

    @classmethod
    def parse(cls, text: str) -> "Paint":
        if "gradient(" in text.lower():
            raise InvalidGradient("gradient strings are not supported")
        return cls(BigColor.from_string(text))

    def is_solid(self) -> bool:
        return isinstance(self.value, BigColor)

    def is_gradient(self) -> bool:
        return isinstance(self.value, Gradient)

    def as_solid(self) -> BigColor:
        if not self.is_solid():
            raise UnsupportedConversion("gradient cannot be used as a solid color")
        return self.value

    def as_gradient(self) -> Gradient:
        if not self.is_gradient():
            raise UnsupportedConversion("solid color is not a gradient")
        return self.value

    def to_hex_string(self) -> str:
        return self.as_solid().to_hex_string()

    def to_rgb_string(self) -> str:
        return self.as_solid().to_rgb_string()

    def to_hsl_string(self) -> str:
        return self.as_solid().to_hsl_string()

    def __str__(self) -> str:
        if self.is_gradient():
            return self.value.to_css_string()
        return self.value.to_string()
