"""
Value models for every color space the library converts between.

These are transient intermediates: the canonical state of a color is
always OKLCH + alpha (see ``bigcolor.color``). Ranges are documented on
each field; conversion functions clamp before building a model.
"""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field


class ColorFormat(str, Enum):
    """Textual format a color was parsed from, or should be written as."""

    RGB = "rgb"
    PRGB = "prgb"
    HEX = "hex"
    HEX3 = "hex3"
    HEX6 = "hex6"
    HEX8 = "hex8"
    HSL = "hsl"
    HSV = "hsv"
    HSB = "hsb"
    HWB = "hwb"
    LAB = "lab"
    LCH = "lch"
    OKLAB = "oklab"
    OKLCH = "oklch"
    CMYK = "cmyk"
    NAME = "name"
    INVALID = "invalid"


class RGB(BaseModel):
    r: int = Field(ge=0, le=255)
    g: int = Field(ge=0, le=255)
    b: int = Field(ge=0, le=255)
    a: float = Field(default=1.0, ge=0.0, le=1.0)


class PercentageRGB(BaseModel):
    r: float = Field(ge=0.0, le=100.0)
    g: float = Field(ge=0.0, le=100.0)
    b: float = Field(ge=0.0, le=100.0)
    a: float = Field(default=1.0, ge=0.0, le=1.0)


class HSL(BaseModel):
    """Hue in degrees, saturation and lightness as fractions."""

    h: float = Field(ge=0.0, le=360.0)
    s: float = Field(ge=0.0, le=1.0)
    l: float = Field(ge=0.0, le=1.0)
    a: float = Field(default=1.0, ge=0.0, le=1.0)


class HSV(BaseModel):
    """Hue in degrees, saturation and value as fractions."""

    h: float = Field(ge=0.0, le=360.0)
    s: float = Field(ge=0.0, le=1.0)
    v: float = Field(ge=0.0, le=1.0)
    a: float = Field(default=1.0, ge=0.0, le=1.0)


class HWB(BaseModel):
    """Hue in degrees, whiteness and blackness as fractions."""

    h: float = Field(ge=0.0, le=360.0)
    w: float = Field(ge=0.0, le=1.0)
    b: float = Field(ge=0.0, le=1.0)
    a: float = Field(default=1.0, ge=0.0, le=1.0)


class CMYK(BaseModel):
    """Subtractive model, every ink in percent."""

    c: float = Field(ge=0.0, le=100.0)
    m: float = Field(ge=0.0, le=100.0)
    y: float = Field(ge=0.0, le=100.0)
    k: float = Field(ge=0.0, le=100.0)
    a: float = Field(default=1.0, ge=0.0, le=1.0)


class XYZ(BaseModel):
    """CIE XYZ relative to a reference white (Y of white = 1)."""

    x: float
    y: float
    z: float
    white: Literal["D65", "D50"] = "D65"
    alpha: float = Field(default=1.0, ge=0.0, le=1.0)


class Lab(BaseModel):
    """CIE Lab (D50). ``l`` in 0..100, ``a``/``b`` roughly -125..125."""

    l: float
    a: float
    b: float
    alpha: float = Field(default=1.0, ge=0.0, le=1.0)


class LCH(BaseModel):
    """Cylindrical CIE Lab. ``c`` 0..150+, ``h`` degrees."""

    l: float
    c: float
    h: float
    alpha: float = Field(default=1.0, ge=0.0, le=1.0)


class OKLab(BaseModel):
    """OKLab. ``l`` in 0..1, ``a``/``b`` roughly -0.4..0.4."""

    l: float
    a: float
    b: float
    alpha: float = Field(default=1.0, ge=0.0, le=1.0)


class OKLCH(BaseModel):
    """Cylindrical OKLab. ``l`` 0..1, ``c`` 0..0.4+, ``h`` degrees in [0, 360)."""

    l: float
    c: float
    h: float
    alpha: float = Field(default=1.0, ge=0.0, le=1.0)
