"""
CSS-style color string parsing.

Supported: named colors, transparent, hex 3/4/6/8 (with or without ``#``),
rgb/rgba, hsl/hsla, hsv/hsva, hsb/hsba, hwb, lab, lch, oklab, oklch,
cmyk/cmyka, color() and the bare ``H S% L%`` shorthand. Arguments may be
comma- or space-separated with an optional ``/ alpha``.

``parse_input`` produces a tagged ``ParsedColor`` or raises a
``ParseColorError`` subclass; ``parsed_to_rgb`` resolves it to sRGB.
"""

import logging
import math
import re
from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field

from .conversion import (
    bound_alpha,
    clamp,
    clamp_01,
    cmyk_to_rgb,
    hex_to_rgb,
    hsl_to_rgb,
    hsv_to_rgb,
    hwb_to_rgb,
    lab_to_rgb,
    lch_to_rgb,
    linear_to_srgb,
    oklab_to_rgb,
    oklch_to_rgb,
    to_byte,
)
from .errors import (
    EmptyColorString,
    InvalidCmykColor,
    InvalidColorFunction,
    InvalidFunction,
    InvalidHexColor,
    InvalidHslColor,
    InvalidHsvColor,
    InvalidHwb,
    InvalidLabColor,
    InvalidNumberFormat,
    InvalidRgbColor,
    InvalidUnknown,
    InvalidValue,
    InvalidXyzColor,
    ParseColorError,
)
from .matrix import WHITE_D50, WHITE_D65, XYZ_TO_SRGB_M, adapt_xyz, multiply_v3_m3x3
from .names import lookup_name
from .spaces import CMYK, HSL, HSV, HWB, LCH, OKLCH, RGB, ColorFormat, Lab, OKLab

logger = logging.getLogger(__name__)


class ColorKind(str, Enum):
    RGB = "rgb"
    RGBA = "rgba"
    HSL = "hsl"
    HSLA = "hsla"
    HSV = "hsv"
    HSVA = "hsva"
    HWB = "hwb"
    HEX = "hex"
    HEX8 = "hex8"
    NAME = "name"
    LAB = "lab"
    LCH = "lch"
    OKLAB = "oklab"
    OKLCH = "oklch"
    CMYK = "cmyk"
    COLOR = "color"


class ParsedColor(BaseModel):
    """
    One successful parse.

    ``components`` are already in the units of the matching model in
    ``bigcolor.spaces``: 0..255 for the RGB kinds (RGB, RGBA, HEX, HEX8,
    NAME), degrees and fractions for HSL/HSV/HWB, percent for CMYK and
    sRGB fractions for COLOR.
    """

    kind: ColorKind
    components: Tuple[float, ...]
    alpha: float = Field(default=1.0, ge=0.0, le=1.0)
    format: ColorFormat
    space: Optional[str] = None


# Regular expression patterns
num = r"[+-]?(?:\d+(?:\.\d+)?|\.\d+)(?:e[+-]?\d+)?"
HEX_DIGITS_RE = re.compile(r"^[0-9a-f]{3,8}$")
FUNCTION_RE = re.compile(r"^([a-z][a-z0-9-]*)\s*\((.*)\)$", re.DOTALL)
HSL_SHORTHAND_RE = re.compile(
    f"^({num})(?:deg)?[\\s,]+({num})%[\\s,]+({num})%$"
)

# Chroma/axis values corresponding to 100%
LAB_AB_PERCENT = 125.0
LCH_C_PERCENT = 150.0
OKLAB_AB_PERCENT = 0.4

# Largest accepted magnitude for the a/b and chroma axes
LAB_AB_LIMIT = LAB_AB_PERCENT * 4
LCH_C_LIMIT = LCH_C_PERCENT * 4
OKLAB_AB_LIMIT = OKLAB_AB_PERCENT * 4

# Approximate Display P3 -> sRGB, applied to encoded values
P3_TO_SRGB_APPROX = (
    (1.0483, -0.0483, 0.0),
    (0.0, 1.0121, -0.0121),
    (0.0, -0.0181, 1.0181),
)

# Component helpers -----------------------------------------------


def parse_number(token: str) -> float:
    """Parse a plain number; ``none`` reads as 0."""
    t = token.strip()
    if t == "none":
        return 0.0
    try:
        v = float(t)
    except ValueError as e:
        raise InvalidNumberFormat(token) from e
    if not math.isfinite(v):
        raise InvalidNumberFormat(token)
    return v


def parse_unit(token: str) -> Tuple[float, bool]:
    """Parse a number or percentage, returning (value, is_percentage)."""
    t = token.strip()
    if t.endswith("%"):
        return parse_number(t[:-1]), True
    return parse_number(t), False


def parse_percentage(token: str) -> float:
    """``50%`` and ``50`` both read as 0.5."""
    v, _ = parse_unit(token)
    return v / 100


def parse_hue(token: str) -> float:
    """Convert angle string to degrees."""
    deg = _hue_degrees(token.strip())
    if not math.isfinite(deg):
        raise InvalidNumberFormat(token)
    return deg


def _hue_degrees(t: str) -> float:
    # grad must be checked before rad
    if t.endswith("deg"):
        return parse_number(t[:-3])
    if t.endswith("grad"):
        return parse_number(t[:-4]) * 0.9
    if t.endswith("rad"):
        return math.degrees(parse_number(t[:-3]))
    if t.endswith("turn"):
        return parse_number(t[:-4]) * 360
    return parse_number(t)


def parse_alpha(token: Optional[str]) -> float:
    """Number or percentage; anything unusable becomes 1.0."""
    if token is None:
        return 1.0
    try:
        v, is_pct = parse_unit(token)
    except ParseColorError:
        logger.debug("Ignoring unparsable alpha %r", token)
        return 1.0
    return bound_alpha(v / 100 if is_pct else v)


def split_args(body: str, count: int) -> Optional[Tuple[List[str], Optional[str]]]:
    """
    Split a function body into ``count`` components and an optional alpha.

    "1, 2, 3, 0.5" => ["1", "2", "3"], "0.5"
    "1 2 3 / 50%"  => ["1", "2", "3"], "50%"
    Returns None when the component count does not match.
    """
    alpha = None
    if "/" in body:
        head, alpha = body.split("/", 1)
        parts = head.replace(",", " ").split()
        alpha = alpha.strip()
    elif "," in body:
        parts = [p.strip() for p in body.split(",")]
    else:
        parts = body.split()

    if alpha is None and len(parts) == count + 1:
        alpha = parts.pop()
    if len(parts) != count:
        return None
    return parts, alpha


# Notations -------------------------------------------------------


def _parse_rgb(name: str, body: str) -> ParsedColor:
    args = split_args(body, 3)
    if args is None:
        raise InvalidRgbColor(body)
    parts, alpha = args

    values = [parse_unit(p) for p in parts]
    flags = {is_pct for (_, is_pct), p in zip(values, parts) if p != "none"}
    if len(flags) > 1:
        raise InvalidRgbColor("mixed percentages and numbers")

    is_pct = flags == {True}
    comps = tuple(
        clamp(v * 255 / 100 if is_pct else v, 0, 255) for v, _ in values
    )
    has_alpha = alpha is not None or name == "rgba"
    return ParsedColor(
        kind=ColorKind.RGBA if has_alpha else ColorKind.RGB,
        components=comps,
        alpha=parse_alpha(alpha),
        format=ColorFormat.PRGB if is_pct else ColorFormat.RGB,
    )


def _parse_hue_triplet(body: str, error) -> Tuple[Tuple[float, float, float], Optional[str]]:
    args = split_args(body, 3)
    if args is None:
        raise error(body)
    parts, alpha = args
    comps = (
        parse_hue(parts[0]),
        clamp_01(parse_percentage(parts[1])),
        clamp_01(parse_percentage(parts[2])),
    )
    return comps, alpha


def _parse_hsl(name: str, body: str) -> ParsedColor:
    comps, alpha = _parse_hue_triplet(body, InvalidHslColor)
    has_alpha = alpha is not None or name == "hsla"
    return ParsedColor(
        kind=ColorKind.HSLA if has_alpha else ColorKind.HSL,
        components=comps,
        alpha=parse_alpha(alpha),
        format=ColorFormat.HSL,
    )


def _parse_hsv(name: str, body: str) -> ParsedColor:
    comps, alpha = _parse_hue_triplet(body, InvalidHsvColor)
    has_alpha = alpha is not None or name.endswith("a")
    return ParsedColor(
        kind=ColorKind.HSVA if has_alpha else ColorKind.HSV,
        components=comps,
        alpha=parse_alpha(alpha),
        format=ColorFormat.HSB if name.startswith("hsb") else ColorFormat.HSV,
    )


def _parse_hwb(name: str, body: str) -> ParsedColor:
    comps, alpha = _parse_hue_triplet(body, InvalidHwb)
    return ParsedColor(
        kind=ColorKind.HWB,
        components=comps,
        alpha=parse_alpha(alpha),
        format=ColorFormat.HWB,
    )


def _scaled(token: str, percent_scale: float) -> float:
    v, is_pct = parse_unit(token)
    return v * percent_scale / 100 if is_pct else v


def _axis(token: str, percent_scale: float, limit: float) -> float:
    return clamp(_scaled(token, percent_scale), -limit, limit)


def _chroma(token: str, percent_scale: float, limit: float) -> float:
    return clamp(_scaled(token, percent_scale), 0.0, limit)


def _parse_lab(name: str, body: str) -> ParsedColor:
    args = split_args(body, 3)
    if args is None:
        raise InvalidLabColor(body)
    parts, alpha = args

    l = clamp(parse_unit(parts[0])[0], 0, 100)
    if name == "lab":
        comps = (
            l,
            _axis(parts[1], LAB_AB_PERCENT, LAB_AB_LIMIT),
            _axis(parts[2], LAB_AB_PERCENT, LAB_AB_LIMIT),
        )
        kind, fmt = ColorKind.LAB, ColorFormat.LAB
    else:
        c = _chroma(parts[1], LCH_C_PERCENT, LCH_C_LIMIT)
        comps = (l, c, parse_hue(parts[2]))
        kind, fmt = ColorKind.LCH, ColorFormat.LCH
    return ParsedColor(kind=kind, components=comps, alpha=parse_alpha(alpha), format=fmt)


def _parse_oklab(name: str, body: str) -> ParsedColor:
    args = split_args(body, 3)
    if args is None:
        raise InvalidLabColor(body)
    parts, alpha = args

    # percentage lightness or the decimal 0..1 form
    l = clamp_01(_scaled(parts[0], 1.0))
    if name == "oklab":
        comps = (
            l,
            _axis(parts[1], OKLAB_AB_PERCENT, OKLAB_AB_LIMIT),
            _axis(parts[2], OKLAB_AB_PERCENT, OKLAB_AB_LIMIT),
        )
        kind, fmt = ColorKind.OKLAB, ColorFormat.OKLAB
    else:
        c = _chroma(parts[1], OKLAB_AB_PERCENT, OKLAB_AB_LIMIT)
        comps = (l, c, parse_hue(parts[2]))
        kind, fmt = ColorKind.OKLCH, ColorFormat.OKLCH
    return ParsedColor(kind=kind, components=comps, alpha=parse_alpha(alpha), format=fmt)


def _parse_cmyk(name: str, body: str) -> ParsedColor:
    args = split_args(body, 4)
    if args is None:
        raise InvalidCmykColor(body)
    parts, alpha = args
    comps = tuple(clamp(parse_unit(p)[0], 0, 100) for p in parts)
    return ParsedColor(
        kind=ColorKind.CMYK,
        components=comps,
        alpha=parse_alpha(alpha),
        format=ColorFormat.CMYK,
    )


def _color_component(token: str) -> float:
    v, is_pct = parse_unit(token)
    return v / 100 if is_pct else v


def _parse_color_function(name: str, body: str) -> ParsedColor:
    tokens = body.split(None, 1)
    if not tokens:
        raise InvalidColorFunction(body)
    space = tokens[0]
    rest = tokens[1] if len(tokens) > 1 else ""

    is_xyz = space in ("xyz", "xyz-d65", "xyz-d50")
    if not is_xyz and space not in (
        "srgb", "srgb-linear", "display-p3", "a98-rgb", "prophoto-rgb", "rec2020"
    ):
        raise InvalidColorFunction(space)

    args = split_args(rest, 3)
    if args is None:
        raise (InvalidXyzColor if is_xyz else InvalidColorFunction)(body)
    parts, alpha = args
    c = tuple(_color_component(p) for p in parts)

    if is_xyz:
        if space == "xyz-d50":
            c = adapt_xyz(c, WHITE_D50, WHITE_D65)
        c = tuple(linear_to_srgb(v) for v in multiply_v3_m3x3(c, XYZ_TO_SRGB_M))
    elif space == "srgb-linear":
        c = tuple(linear_to_srgb(clamp_01(v)) for v in c)
    elif space == "display-p3":
        c = multiply_v3_m3x3(c, P3_TO_SRGB_APPROX)

    return ParsedColor(
        kind=ColorKind.COLOR,
        components=tuple(clamp_01(v) for v in c),
        alpha=parse_alpha(alpha),
        format=ColorFormat.RGB,
        space=space,
    )


FUNCTIONS = {
    "rgb": _parse_rgb,
    "rgba": _parse_rgb,
    "hsl": _parse_hsl,
    "hsla": _parse_hsl,
    "hsv": _parse_hsv,
    "hsva": _parse_hsv,
    "hsb": _parse_hsv,
    "hsba": _parse_hsv,
    "hwb": _parse_hwb,
    "lab": _parse_lab,
    "lch": _parse_lab,
    "oklab": _parse_oklab,
    "oklch": _parse_oklab,
    "cmyk": _parse_cmyk,
    "cmyka": _parse_cmyk,
    "color": _parse_color_function,
}


def _from_rgb(rgb: RGB, kind: ColorKind, fmt: ColorFormat) -> ParsedColor:
    return ParsedColor(
        kind=kind,
        components=(float(rgb.r), float(rgb.g), float(rgb.b)),
        alpha=rgb.a,
        format=fmt,
    )


def parse_input(text: str) -> ParsedColor:
    """Parse a color string into its tagged form, raising on failure."""
    s = (text or "").strip().lower()
    if not s:
        raise EmptyColorString()

    named = lookup_name(s)
    if named is not None:
        return _from_rgb(hex_to_rgb(named), ColorKind.NAME, ColorFormat.NAME)

    if s == "transparent":
        return ParsedColor(
            kind=ColorKind.NAME, components=(0.0, 0.0, 0.0), alpha=0.0, format=ColorFormat.NAME
        )

    if s.startswith("#") or (HEX_DIGITS_RE.match(s) and len(s) in (3, 4, 6, 8)):
        rgb = hex_to_rgb(s)
        if rgb is None:
            raise InvalidHexColor(text)
        digits = len(s.lstrip("#"))
        if digits in (4, 8):
            return _from_rgb(rgb, ColorKind.HEX8, ColorFormat.HEX8)
        return _from_rgb(rgb, ColorKind.HEX, ColorFormat.HEX)

    m = FUNCTION_RE.match(s)
    if m:
        name, body = m.group(1), m.group(2).strip()
        handler = FUNCTIONS.get(name)
        if handler is None:
            raise InvalidFunction(name)
        return handler(name, body)
    if "(" in s:
        raise InvalidFunction(text)

    m = HSL_SHORTHAND_RE.match(s)
    if m:
        h, sat, light = (parse_number(g) for g in m.groups())
        return ParsedColor(
            kind=ColorKind.HSL,
            components=(h, clamp_01(sat / 100), clamp_01(light / 100)),
            format=ColorFormat.HSL,
        )

    raise InvalidUnknown(text)


def parsed_to_rgb(parsed: ParsedColor) -> RGB:
    """
    Resolve a parsed color to 8-bit sRGB. Arithmetic failures on extreme
    components surface as ``InvalidValue``.
    """
    try:
        return _resolve_rgb(parsed)
    except (ArithmeticError, ValueError) as e:
        raise InvalidValue(str(parsed.components)) from e


def _resolve_rgb(parsed: ParsedColor) -> RGB:
    c = parsed.components
    a = parsed.alpha
    kind = parsed.kind

    if kind in (ColorKind.RGB, ColorKind.RGBA, ColorKind.HEX, ColorKind.HEX8, ColorKind.NAME):
        return RGB(r=round(c[0]), g=round(c[1]), b=round(c[2]), a=a)
    elif kind in (ColorKind.HSL, ColorKind.HSLA):
        return hsl_to_rgb(HSL(h=c[0] % 360, s=c[1], l=c[2], a=a))
    elif kind in (ColorKind.HSV, ColorKind.HSVA):
        return hsv_to_rgb(HSV(h=c[0] % 360, s=c[1], v=c[2], a=a))
    elif kind == ColorKind.HWB:
        return hwb_to_rgb(HWB(h=c[0] % 360, w=c[1], b=c[2], a=a))
    elif kind == ColorKind.LAB:
        return lab_to_rgb(Lab(l=c[0], a=c[1], b=c[2], alpha=a))
    elif kind == ColorKind.LCH:
        return lch_to_rgb(LCH(l=c[0], c=c[1], h=c[2], alpha=a))
    elif kind == ColorKind.OKLAB:
        return oklab_to_rgb(OKLab(l=c[0], a=c[1], b=c[2], alpha=a))
    elif kind == ColorKind.OKLCH:
        return oklch_to_rgb(OKLCH(l=c[0], c=c[1], h=c[2], alpha=a))
    elif kind == ColorKind.CMYK:
        return cmyk_to_rgb(CMYK(c=c[0], m=c[1], y=c[2], k=c[3], a=a))
    return RGB(r=to_byte(c[0]), g=to_byte(c[1]), b=to_byte(c[2]), a=a)


def parse(text: str):
    """
    Strict entry point: parse ``text`` into a ``BigColor`` or raise a
    ``ParseColorError`` subclass.
    """
    from .color import BigColor

    return BigColor.from_string(text)
