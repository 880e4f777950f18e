"""
The canonical color type.

A ``BigColor`` stores OKLCH + alpha and derives every other representation
on demand. Constructing from a string never raises: unparsable input gives
an invalid black sentinel that reports ``is_valid() == False``. Use
``BigColor.from_string`` (or ``bigcolor.parse``) for the strict path.
"""

import logging
from typing import List, Optional

from .conversion import (
    bound_alpha,
    clamp,
    clamp_01,
    cmyk_to_rgb,
    format_number,
    hsl_to_rgb,
    hsv_to_rgb,
    hwb_to_rgb,
    lab_to_rgb,
    lch_to_rgb,
    oklab_to_oklch,
    oklch_to_oklab,
    oklch_to_rgb,
    rgb_to_cmyk,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_hsv,
    rgb_to_hwb,
    rgb_to_lab,
    rgb_to_lch,
    rgb_to_luminance,
    rgb_to_oklch,
    rgb_to_percentage_rgb,
    rgb_to_xyz_d65,
    rgba_to_argb_hex,
    rgba_to_hex,
)
from .errors import ParseColorError
from .matrix import constrain_angle
from .names import lookup_hex
from .parser import LAB_AB_LIMIT, LCH_C_LIMIT, OKLAB_AB_LIMIT, parse_input, parsed_to_rgb
from .spaces import (
    CMYK,
    HSL,
    HSV,
    HWB,
    LCH,
    OKLCH,
    RGB,
    XYZ,
    ColorFormat,
    Lab,
    OKLab,
    PercentageRGB,
)

logger = logging.getLogger(__name__)

ALPHA_EPSILON = 1e-7
DEFAULT_AMOUNT = 10.0


class BigColor:
    """A color stored as OKLCH + alpha."""

    def __init__(self, text: str = ""):
        self.oklch = OKLCH(l=0.0, c=0.0, h=0.0, alpha=1.0)
        self.original_input = text
        self.format = ColorFormat.INVALID
        self.ok = False

        if not text:
            return
        try:
            parsed = parse_input(text)
        except ParseColorError as e:
            logger.debug("Invalid color %r: %s", text, e)
            return
        self._set_rgb(parsed_to_rgb(parsed), parsed.format)

    def _set_rgb(self, rgb: RGB, fmt: ColorFormat) -> None:
        self.oklch = rgb_to_oklch(rgb.r, rgb.g, rgb.b, rgb.a)
        self.format = fmt
        self.ok = True

    @classmethod
    def _from_rgb_model(cls, rgb: RGB, fmt: ColorFormat) -> "BigColor":
        color = cls()
        color._set_rgb(rgb, fmt)
        color.original_input = color.to_string()
        return color

    # Factories ---------------------------------------------------

    @classmethod
    def from_string(cls, text: str) -> "BigColor":
        """Parse ``text``, raising a ``ParseColorError`` subclass on failure."""
        parsed = parse_input(text)
        color = cls()
        color._set_rgb(parsed_to_rgb(parsed), parsed.format)
        color.original_input = text
        return color

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int, a: float = 1.0) -> "BigColor":
        rgb = RGB(
            r=int(clamp(round(r), 0, 255)),
            g=int(clamp(round(g), 0, 255)),
            b=int(clamp(round(b), 0, 255)),
            a=bound_alpha(a),
        )
        return cls._from_rgb_model(rgb, ColorFormat.RGB)

    @classmethod
    def from_rgba8(cls, r: int, g: int, b: int, a: int = 255) -> "BigColor":
        """All four channels as bytes."""
        return cls.from_rgb(r, g, b, clamp(a, 0, 255) / 255)

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float, a: float = 1.0) -> "BigColor":
        """``h`` in degrees, ``s`` and ``l`` as fractions in [0, 1]."""
        hsl = HSL(h=constrain_angle(h), s=clamp_01(s), l=clamp_01(l), a=bound_alpha(a))
        return cls._from_rgb_model(hsl_to_rgb(hsl), ColorFormat.HSL)

    @classmethod
    def from_hsv(cls, h: float, s: float, v: float, a: float = 1.0) -> "BigColor":
        """``h`` in degrees, ``s`` and ``v`` as fractions in [0, 1]."""
        hsv = HSV(h=constrain_angle(h), s=clamp_01(s), v=clamp_01(v), a=bound_alpha(a))
        return cls._from_rgb_model(hsv_to_rgb(hsv), ColorFormat.HSV)

    @classmethod
    def from_hsb(cls, h: float, s: float, b: float, a: float = 1.0) -> "BigColor":
        color = cls.from_hsv(h, s, b, a)
        color.format = ColorFormat.HSB
        color.original_input = color.to_string()
        return color

    @classmethod
    def from_hwb(cls, h: float, w: float, b: float, a: float = 1.0) -> "BigColor":
        hwb = HWB(h=constrain_angle(h), w=clamp_01(w), b=clamp_01(b), a=bound_alpha(a))
        return cls._from_rgb_model(hwb_to_rgb(hwb), ColorFormat.HWB)

    @classmethod
    def from_lab(cls, l: float, a: float, b: float, alpha: float = 1.0) -> "BigColor":
        lab = Lab(
            l=clamp(l, 0, 100),
            a=clamp(a, -LAB_AB_LIMIT, LAB_AB_LIMIT),
            b=clamp(b, -LAB_AB_LIMIT, LAB_AB_LIMIT),
            alpha=bound_alpha(alpha),
        )
        return cls._from_rgb_model(lab_to_rgb(lab), ColorFormat.LAB)

    @classmethod
    def from_lch(cls, l: float, c: float, h: float, alpha: float = 1.0) -> "BigColor":
        lch = LCH(
            l=clamp(l, 0, 100),
            c=clamp(c, 0.0, LCH_C_LIMIT),
            h=constrain_angle(h),
            alpha=bound_alpha(alpha),
        )
        return cls._from_rgb_model(lch_to_rgb(lch), ColorFormat.LCH)

    @classmethod
    def from_oklab(cls, l: float, a: float, b: float, alpha: float = 1.0) -> "BigColor":
        oklab = OKLab(
            l=clamp_01(l),
            a=clamp(a, -OKLAB_AB_LIMIT, OKLAB_AB_LIMIT),
            b=clamp(b, -OKLAB_AB_LIMIT, OKLAB_AB_LIMIT),
            alpha=bound_alpha(alpha),
        )
        return cls.from_oklch_model(oklab_to_oklch(oklab), ColorFormat.OKLAB)

    @classmethod
    def from_oklch(cls, l: float, c: float, h: float, alpha: float = 1.0) -> "BigColor":
        """Stored as given (no sRGB round trip), after range normalization."""
        oklch = OKLCH(l=l, c=c, h=h, alpha=bound_alpha(alpha))
        return cls.from_oklch_model(oklch, ColorFormat.OKLCH)

    @classmethod
    def from_oklch_model(cls, oklch: OKLCH, fmt: ColorFormat = ColorFormat.OKLCH) -> "BigColor":
        color = cls()
        color.oklch = OKLCH(
            l=clamp_01(oklch.l),
            c=clamp(oklch.c, 0.0, OKLAB_AB_LIMIT),
            h=constrain_angle(oklch.h),
            alpha=bound_alpha(oklch.alpha),
        )
        color.format = fmt
        color.ok = True
        color.original_input = color.to_string()
        return color

    @classmethod
    def from_cmyk(
        cls, c: float, m: float, y: float, k: float, a: float = 1.0
    ) -> "BigColor":
        """Inks in percent (0..100)."""
        cmyk = CMYK(
            c=clamp(c, 0, 100),
            m=clamp(m, 0, 100),
            y=clamp(y, 0, 100),
            k=clamp(k, 0, 100),
            a=bound_alpha(a),
        )
        return cls._from_rgb_model(cmyk_to_rgb(cmyk), ColorFormat.CMYK)

    # Queries -----------------------------------------------------

    def is_valid(self) -> bool:
        return self.ok

    def get_original_input(self) -> str:
        return self.original_input

    def get_format(self) -> ColorFormat:
        return self.format

    def get_alpha(self) -> float:
        return self.oklch.alpha

    def set_alpha(self, value: float) -> "BigColor":
        self.oklch = self.oklch.model_copy(update={"alpha": bound_alpha(value)})
        return self

    def get_brightness(self) -> float:
        """OKLCH lightness scaled to 0..255."""
        return self.oklch.l * 255

    def get_luminance(self) -> float:
        """WCAG relative luminance in [0, 1]."""
        rgb = self.to_rgb()
        return rgb_to_luminance(rgb.r, rgb.g, rgb.b)

    def is_dark(self) -> bool:
        return self.oklch.l < 0.5

    def is_light(self) -> bool:
        return not self.is_dark()

    def _is_opaque(self) -> bool:
        return abs(self.oklch.alpha - 1.0) < ALPHA_EPSILON

    # Accessors ---------------------------------------------------

    def to_rgb(self) -> RGB:
        return oklch_to_rgb(self.oklch)

    def to_percentage_rgb(self) -> PercentageRGB:
        rgb = self.to_rgb()
        return rgb_to_percentage_rgb(rgb.r, rgb.g, rgb.b, rgb.a)

    def to_hsl(self) -> HSL:
        rgb = self.to_rgb()
        return rgb_to_hsl(rgb.r, rgb.g, rgb.b, rgb.a)

    def to_hsv(self) -> HSV:
        rgb = self.to_rgb()
        return rgb_to_hsv(rgb.r, rgb.g, rgb.b, rgb.a)

    def to_hsb(self) -> HSV:
        return self.to_hsv()

    def to_hwb(self) -> HWB:
        rgb = self.to_rgb()
        return rgb_to_hwb(rgb.r, rgb.g, rgb.b, rgb.a)

    def to_cmyk(self) -> CMYK:
        rgb = self.to_rgb()
        return rgb_to_cmyk(rgb.r, rgb.g, rgb.b, rgb.a)

    def to_xyz(self) -> XYZ:
        """XYZ relative to D65."""
        rgb = self.to_rgb()
        return rgb_to_xyz_d65(rgb.r, rgb.g, rgb.b, rgb.a)

    def to_lab(self) -> Lab:
        rgb = self.to_rgb()
        return rgb_to_lab(rgb.r, rgb.g, rgb.b, rgb.a)

    def to_lch(self) -> LCH:
        rgb = self.to_rgb()
        return rgb_to_lch(rgb.r, rgb.g, rgb.b, rgb.a)

    def to_oklab(self) -> OKLab:
        return oklch_to_oklab(self.oklch)

    def to_oklch(self) -> OKLCH:
        return self.oklch.model_copy()

    def to_hex(self, allow_3_char: bool = False) -> str:
        rgb = self.to_rgb()
        return rgb_to_hex(rgb.r, rgb.g, rgb.b, allow_3_char)

    def to_hex8(self, allow_4_char: bool = False) -> str:
        rgb = self.to_rgb()
        return rgba_to_hex(rgb.r, rgb.g, rgb.b, self.oklch.alpha, allow_4_char)

    def to_name(self) -> Optional[str]:
        """Named color for this value; "transparent" at alpha 0."""
        if self.oklch.alpha == 0:
            return "transparent"
        if self.oklch.alpha < 1:
            return None
        return lookup_hex(self.to_hex())

    # Formatters --------------------------------------------------

    def _alpha_str(self) -> str:
        return format_number(self.oklch.alpha, 2)

    def to_hex_string(self, allow_3_char: bool = False) -> str:
        return "#" + self.to_hex(allow_3_char)

    def to_hex8_string(self, allow_4_char: bool = False) -> str:
        return "#" + self.to_hex8(allow_4_char)

    def to_argb_hex_string(self) -> str:
        """"#aarrggbb", alpha first."""
        rgb = self.to_rgb()
        return "#" + rgba_to_argb_hex(rgb.r, rgb.g, rgb.b, self.oklch.alpha)

    def to_rgb_string(self) -> str:
        rgb = self.to_rgb()
        if self._is_opaque():
            return f"rgb({rgb.r}, {rgb.g}, {rgb.b})"
        return f"rgba({rgb.r}, {rgb.g}, {rgb.b}, {self._alpha_str()})"

    def to_percentage_rgb_string(self) -> str:
        p = self.to_percentage_rgb()
        r, g, b = format_number(p.r), format_number(p.g), format_number(p.b)
        if self._is_opaque():
            return f"rgb({r}%, {g}%, {b}%)"
        return f"rgba({r}%, {g}%, {b}%, {self._alpha_str()})"

    def to_hsl_string(self) -> str:
        hsl = self.to_hsl()
        h, s, l = round(hsl.h), round(hsl.s * 100), round(hsl.l * 100)
        if self._is_opaque():
            return f"hsl({h}, {s}%, {l}%)"
        return f"hsla({h}, {s}%, {l}%, {self._alpha_str()})"

    def _hsv_string(self, name: str) -> str:
        hsv = self.to_hsv()
        h, s, v = round(hsv.h), round(hsv.s * 100), round(hsv.v * 100)
        if self._is_opaque():
            return f"{name}({h}, {s}%, {v}%)"
        return f"{name}a({h}, {s}%, {v}%, {self._alpha_str()})"

    def to_hsv_string(self) -> str:
        return self._hsv_string("hsv")

    def to_hsb_string(self) -> str:
        return self._hsv_string("hsb")

    def to_hwb_string(self) -> str:
        hwb = self.to_hwb()
        body = f"{round(hwb.h)} {round(hwb.w * 100)}% {round(hwb.b * 100)}%"
        if self._is_opaque():
            return f"hwb({body})"
        return f"hwb({body} / {self._alpha_str()})"

    def to_cmyk_string(self) -> str:
        cmyk = self.to_cmyk()
        body = f"{round(cmyk.c)}%, {round(cmyk.m)}%, {round(cmyk.y)}%, {round(cmyk.k)}%"
        if self._is_opaque():
            return f"cmyk({body})"
        return f"cmyka({body}, {self._alpha_str()})"

    def _slash_alpha(self, name: str, body: str) -> str:
        if self._is_opaque():
            return f"{name}({body})"
        return f"{name}({body} / {self._alpha_str()})"

    def to_lab_string(self) -> str:
        lab = self.to_lab()
        return self._slash_alpha(
            "lab", f"{format_number(lab.l)} {format_number(lab.a)} {format_number(lab.b)}"
        )

    def to_lch_string(self) -> str:
        lch = self.to_lch()
        return self._slash_alpha(
            "lch", f"{format_number(lch.l)} {format_number(lch.c)} {format_number(lch.h)}"
        )

    def to_oklab_string(self) -> str:
        ok = self.to_oklab()
        return self._slash_alpha(
            "oklab",
            f"{format_number(ok.l * 100, 1)}% {format_number(ok.a, 2)} {format_number(ok.b, 2)}",
        )

    def to_oklch_string(self) -> str:
        ok = self.oklch
        return self._slash_alpha(
            "oklch",
            f"{format_number(ok.l * 100, 1)}% {format_number(ok.c, 2)} {format_number(ok.h)}",
        )

    def to_string(self, format: Optional[ColorFormat] = None) -> str:
        """
        Format in ``format`` (default: the format the color was parsed
        from). Hex and name formats cannot carry alpha, so a translucent
        color falls back to the rgb string, except "transparent".
        """
        fmt = ColorFormat(format) if format is not None else self.format
        alpha = self.oklch.alpha

        if alpha < 1 and fmt in (
            ColorFormat.HEX,
            ColorFormat.HEX3,
            ColorFormat.HEX6,
            ColorFormat.HEX8,
            ColorFormat.NAME,
        ):
            if fmt == ColorFormat.NAME and alpha == 0:
                return "transparent"
            return self.to_rgb_string()

        if fmt == ColorFormat.NAME:
            return self.to_name() or self.to_hex_string()
        return self._format(fmt)

    def to(self, format: ColorFormat) -> str:
        """Format explicitly; an invalid color always gives "invalid"."""
        fmt = ColorFormat(format)
        if not self.is_valid() or fmt == ColorFormat.INVALID:
            return "invalid"
        if fmt == ColorFormat.NAME:
            return self.to_name() or self.original_input
        return self._format(fmt)

    def _format(self, fmt: ColorFormat) -> str:
        formatters = {
            ColorFormat.RGB: self.to_rgb_string,
            ColorFormat.PRGB: self.to_percentage_rgb_string,
            ColorFormat.HEX: self.to_hex_string,
            ColorFormat.HEX6: self.to_hex_string,
            ColorFormat.HEX3: lambda: self.to_hex_string(True),
            ColorFormat.HEX8: self.to_hex8_string,
            ColorFormat.HSL: self.to_hsl_string,
            ColorFormat.HSV: self.to_hsv_string,
            ColorFormat.HSB: self.to_hsb_string,
            ColorFormat.HWB: self.to_hwb_string,
            ColorFormat.CMYK: self.to_cmyk_string,
            ColorFormat.LAB: self.to_lab_string,
            ColorFormat.LCH: self.to_lch_string,
            ColorFormat.OKLAB: self.to_oklab_string,
            ColorFormat.OKLCH: self.to_oklch_string,
        }
        return formatters.get(fmt, self.to_hex_string)()

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        if not self.ok:
            return f"BigColor(invalid {self.original_input!r})"
        return f"BigColor({self.to_oklch_string()!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, BigColor):
            return NotImplemented
        a, b = self.oklch, other.oklch
        return a.l == b.l and a.c == b.c and a.h == b.h and a.alpha == b.alpha

    __hash__ = None

    def clone(self) -> "BigColor":
        color = BigColor()
        color.oklch = self.oklch.model_copy()
        color.original_input = self.original_input
        color.format = self.format
        color.ok = self.ok
        return color

    def _with_hue(self, h: float) -> "BigColor":
        color = self.clone()
        color.oklch = color.oklch.model_copy(update={"h": constrain_angle(h)})
        return color

    # Manipulation ------------------------------------------------
    # Every method mutates in OKLCH and returns self for chaining.

    def lighten(self, amount: float = DEFAULT_AMOUNT) -> "BigColor":
        self.oklch = self.oklch.model_copy(update={"l": clamp_01(self.oklch.l + amount / 100)})
        return self

    def darken(self, amount: float = DEFAULT_AMOUNT) -> "BigColor":
        self.oklch = self.oklch.model_copy(update={"l": clamp_01(self.oklch.l - amount / 100)})
        return self

    def saturate(self, amount: float = DEFAULT_AMOUNT) -> "BigColor":
        self.oklch = self.oklch.model_copy(update={"c": max(0.0, self.oklch.c + amount / 100)})
        return self

    def desaturate(self, amount: float = DEFAULT_AMOUNT) -> "BigColor":
        self.oklch = self.oklch.model_copy(update={"c": max(0.0, self.oklch.c - amount / 100)})
        return self

    def greyscale(self) -> "BigColor":
        self.oklch = self.oklch.model_copy(update={"c": 0.0})
        return self

    grayscale = greyscale

    def spin(self, amount: float) -> "BigColor":
        self.oklch = self.oklch.model_copy(update={"h": constrain_angle(self.oklch.h + amount)})
        return self

    def brighten(self, amount: float = DEFAULT_AMOUNT) -> "BigColor":
        """Add ``amount`` percent of full scale to each sRGB channel."""
        rgb = self.to_rgb()
        delta = 255 * amount / 100

        def channel(v: int) -> int:
            return int(clamp(round(v + delta), 0, 255))

        self.oklch = rgb_to_oklch(channel(rgb.r), channel(rgb.g), channel(rgb.b), rgb.a)
        return self

    # Schemes -----------------------------------------------------

    def analogous(self, results: int = 6, slices: int = 30) -> List["BigColor"]:
        part = 360 / slices
        ret = [self.clone()]
        h = constrain_angle(self.oklch.h - (part * results) / 2)
        for _ in range(results - 1):
            h = constrain_angle(h + part)
            ret.append(self._with_hue(h))
        return ret

    def complement(self) -> "BigColor":
        return self._with_hue(self.oklch.h + 180)

    def monochromatic(self, results: int = 6) -> List["BigColor"]:
        """``results`` copies with lightness 0, 1/n, 2/n, ..."""
        if results <= 0:
            return []
        step = 1 / results
        ret = []
        for i in range(results):
            color = self.clone()
            color.oklch = color.oklch.model_copy(update={"l": min(1.0, i * step)})
            ret.append(color)
        return ret

    def split_complement(self) -> List["BigColor"]:
        h = self.oklch.h
        return [self.clone(), self._with_hue(h + 72), self._with_hue(h + 216)]

    def triad(self) -> List["BigColor"]:
        return self.polyad(3)

    def tetrad(self) -> List["BigColor"]:
        return self.polyad(4)

    def polyad(self, number: int) -> List["BigColor"]:
        """``number`` colors evenly spaced in hue, starting with this one."""
        if number <= 0:
            raise ValueError("Argument to polyad must be a positive number")
        step = 360 / number
        return [self.clone()] + [
            self._with_hue(self.oklch.h + i * step) for i in range(1, number)
        ]
