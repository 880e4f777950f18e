"""
Pure color-space conversion functions with sRGB as the hub.

Functions whose source is RGB take scalar channels ``(r, g, b[, a])`` with
``r, g, b`` in 0..255; every other conversion takes the source model from
``bigcolor.spaces``. Angles come back in [0, 360) and fractional outputs are
clamped into their documented range. Nothing here raises on numeric input.

Pipelines:
    RGB -> linear RGB -> XYZ D65 -> (Bradford) XYZ D50 -> Lab -> LCH
    RGB -> linear RGB -> XYZ D65 -> LMS -> cube root -> OKLab -> OKLCH
"""

import math
from typing import Optional, Tuple

from .matrix import (
    LAB_TO_LMS_M,
    LMS_TO_LAB_M,
    LMS_TO_XYZ_M,
    SRGB_TO_XYZ_M,
    WHITE_D50,
    WHITE_D65,
    XYZ_TO_LMS_M,
    XYZ_TO_SRGB_M,
    adapt_xyz,
    constrain_angle,
    multiply_v3_m3x3,
)
from .spaces import CMYK, HSL, HSV, HWB, LCH, OKLCH, RGB, XYZ, Lab, OKLab, PercentageRGB

# CIE Lab constants
EPSILON = 216 / 24389  # 6^3/29^3
EPSILON3 = 24 / 116
KAPPA = 24389 / 27  # 29^3/3^3

ACHROMATIC_THRESHOLD = 1e-10

# Clamping helpers ------------------------------------------------


def clamp(v: float, lo: float, hi: float) -> float:
    """Clamp value between lo and hi."""
    return max(lo, min(hi, v))


def clamp_01(v: float) -> float:
    return clamp(v, 0.0, 1.0)


def bound_01(n: float, max_value: float) -> float:
    """Take input from [0, max_value] and return it as [0, 1]."""
    return clamp(n, 0.0, max_value) / max_value


def bound_alpha(a: Optional[float]) -> float:
    """Return a valid alpha; NaN, missing or out-of-range values become 1."""
    if a is None or math.isnan(a) or a < 0.0 or a > 1.0:
        return 1.0
    return float(a)


def to_byte(v: float) -> int:
    """Fraction in [0, 1] to an 8-bit channel."""
    if math.isnan(v):
        return 0
    return int(clamp(round(v * 255), 0, 255))


def _cbrt(x: float) -> float:
    return math.copysign(abs(x) ** (1 / 3), x)


# sRGB companding -------------------------------------------------


def srgb_to_linear(c: float) -> float:
    """IEC 61966-2-1 decoding, ``c`` in [0, 1]."""
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def linear_to_srgb(l: float) -> float:
    """IEC 61966-2-1 encoding. Out-of-gamut input is not clamped here."""
    if l <= 0.0031308:
        return 12.92 * l
    return 1.055 * (l ** (1 / 2.4)) - 0.055


# HSL / HSV / HWB -------------------------------------------------


def _hue_from_rgb(r: float, g: float, b: float, max_val: float, d: float) -> float:
    if d == 0:
        return 0.0
    if max_val == r:
        h = (g - b) / d + (6 if g < b else 0)
    elif max_val == g:
        h = (b - r) / d + 2
    else:
        h = (r - g) / d + 4
    return constrain_angle(h * 60)


def rgb_to_hsl(r: int, g: int, b: int, a: float = 1.0) -> HSL:
    """Convert RGB to HSL. Achromatic input gives h = s = 0."""
    R, G, B = bound_01(r, 255), bound_01(g, 255), bound_01(b, 255)
    max_val = max(R, G, B)
    min_val = min(R, G, B)
    d = max_val - min_val
    l = (max_val + min_val) / 2

    if d == 0:
        return HSL(h=0.0, s=0.0, l=clamp_01(l), a=bound_alpha(a))

    s = d / (2 - max_val - min_val) if l > 0.5 else d / (max_val + min_val)
    h = _hue_from_rgb(R, G, B, max_val, d)
    return HSL(h=h, s=clamp_01(s), l=clamp_01(l), a=bound_alpha(a))


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb_fractions(h: float, s: float, l: float) -> Tuple[float, float, float]:
    """HSL to RGB fractions. h in degrees, s and l in [0, 1]."""
    s = clamp_01(s)
    l = clamp_01(l)
    if s == 0:
        return l, l, l

    hn = constrain_angle(h) / 360
    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q
    return (
        _hue_to_rgb(p, q, hn + 1 / 3),
        _hue_to_rgb(p, q, hn),
        _hue_to_rgb(p, q, hn - 1 / 3),
    )


def hsl_to_rgb(hsl: HSL) -> RGB:
    """Convert HSL to RGB."""
    r, g, b = hsl_to_rgb_fractions(hsl.h, hsl.s, hsl.l)
    return RGB(r=to_byte(r), g=to_byte(g), b=to_byte(b), a=hsl.a)


def rgb_to_hsv(r: int, g: int, b: int, a: float = 1.0) -> HSV:
    """Convert RGB to HSV. Achromatic input gives h = 0; black gives s = 0."""
    R, G, B = bound_01(r, 255), bound_01(g, 255), bound_01(b, 255)
    max_val = max(R, G, B)
    min_val = min(R, G, B)
    d = max_val - min_val
    s = 0.0 if max_val == 0 else d / max_val
    h = _hue_from_rgb(R, G, B, max_val, d)
    return HSV(h=h, s=clamp_01(s), v=clamp_01(max_val), a=bound_alpha(a))


def hsv_to_rgb_fractions(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """HSV to RGB fractions. h in degrees, s and v in [0, 1]."""
    s = clamp_01(s)
    v = clamp_01(v)
    if s == 0:
        return v, v, v

    hp = constrain_angle(h) / 60
    i = math.floor(hp)
    f = hp - i
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)

    sector = i % 6
    if sector == 0:
        return v, t, p
    elif sector == 1:
        return q, v, p
    elif sector == 2:
        return p, v, t
    elif sector == 3:
        return p, q, v
    elif sector == 4:
        return t, p, v
    return v, p, q


def hsv_to_rgb(hsv: HSV) -> RGB:
    """Convert HSV (a.k.a. HSB) to RGB."""
    r, g, b = hsv_to_rgb_fractions(hsv.h, hsv.s, hsv.v)
    return RGB(r=to_byte(r), g=to_byte(g), b=to_byte(b), a=hsv.a)


def rgb_to_hwb(r: int, g: int, b: int, a: float = 1.0) -> HWB:
    """Convert RGB to HWB; hue is shared with HSV."""
    R, G, B = bound_01(r, 255), bound_01(g, 255), bound_01(b, 255)
    hsv = rgb_to_hsv(r, g, b, a)
    return HWB(h=hsv.h, w=clamp_01(min(R, G, B)), b=clamp_01(1 - max(R, G, B)), a=hsv.a)


def hwb_to_rgb(hwb: HWB) -> RGB:
    """Convert HWB to RGB. Whiteness + blackness >= 1 yields a gray."""
    w, bl = hwb.w, hwb.b
    total = w + bl
    if total >= 1:
        gray = to_byte(w / total)
        return RGB(r=gray, g=gray, b=gray, a=hwb.a)

    # CSS: hue as HSL with s=1 l=0.5, then mix in white and black
    rr, gg, bb = hsl_to_rgb_fractions(hwb.h, 1, 0.5)
    scale = 1 - w - bl
    return RGB(
        r=to_byte(rr * scale + w),
        g=to_byte(gg * scale + w),
        b=to_byte(bb * scale + w),
        a=hwb.a,
    )


# HEX -------------------------------------------------------------


def _pairs_collapse(parts) -> bool:
    return all(p[0] == p[1] for p in parts)


def rgb_to_hex(r: int, g: int, b: int, allow_3_char: bool = False) -> str:
    """
    Encode RGB as 6 hex digits (no ``#``). With ``allow_3_char`` the
    result is compacted to 3 digits when every channel's digits repeat.
    """
    parts = [format(int(v), "02x") for v in (r, g, b)]
    if allow_3_char and _pairs_collapse(parts):
        return "".join(p[0] for p in parts)
    return "".join(parts)


def rgba_to_hex(r: int, g: int, b: int, a: float, allow_4_char: bool = False) -> str:
    """Encode RGBA as 8 hex digits (no ``#``), optionally compacted to 4."""
    parts = [format(int(v), "02x") for v in (r, g, b)]
    parts.append(format(to_byte(bound_alpha(a)), "02x"))
    if allow_4_char and _pairs_collapse(parts):
        return "".join(p[0] for p in parts)
    return "".join(parts)


def rgba_to_argb_hex(r: int, g: int, b: int, a: float) -> str:
    """ARGB hex8, as used by legacy filter syntax."""
    return format(to_byte(bound_alpha(a)), "02x") + rgb_to_hex(r, g, b)


def hex_to_rgb(text: str) -> Optional[RGB]:
    """Decode 3/4/6/8 hex digits with optional ``#``; None when malformed."""
    h = text.strip().lower()
    if h.startswith("#"):
        h = h[1:]
    if len(h) not in (3, 4, 6, 8) or any(c not in "0123456789abcdef" for c in h):
        return None

    if len(h) in (3, 4):
        h = "".join(c * 2 for c in h)
    r = int(h[0:2], 16)
    g = int(h[2:4], 16)
    b = int(h[4:6], 16)
    a = int(h[6:8], 16) / 255 if len(h) == 8 else 1.0
    return RGB(r=r, g=g, b=b, a=a)


# XYZ / Lab / LCH -------------------------------------------------


def rgb_to_xyz_d65(r: int, g: int, b: int, a: float = 1.0) -> XYZ:
    """sRGB (D65) to XYZ D65."""
    lin = (
        srgb_to_linear(bound_01(r, 255)),
        srgb_to_linear(bound_01(g, 255)),
        srgb_to_linear(bound_01(b, 255)),
    )
    x, y, z = multiply_v3_m3x3(lin, SRGB_TO_XYZ_M)
    return XYZ(x=x, y=y, z=z, white="D65", alpha=bound_alpha(a))


def xyz_d65_to_rgb(xyz: XYZ) -> RGB:
    """XYZ D65 to sRGB, clipping out-of-gamut channels."""
    R, G, B = multiply_v3_m3x3((xyz.x, xyz.y, xyz.z), XYZ_TO_SRGB_M)
    return RGB(
        r=to_byte(linear_to_srgb(R)),
        g=to_byte(linear_to_srgb(G)),
        b=to_byte(linear_to_srgb(B)),
        a=xyz.alpha,
    )


def xyz_d65_to_xyz_d50(xyz: XYZ) -> XYZ:
    x, y, z = adapt_xyz((xyz.x, xyz.y, xyz.z), WHITE_D65, WHITE_D50)
    return XYZ(x=x, y=y, z=z, white="D50", alpha=xyz.alpha)


def xyz_d50_to_xyz_d65(xyz: XYZ) -> XYZ:
    x, y, z = adapt_xyz((xyz.x, xyz.y, xyz.z), WHITE_D50, WHITE_D65)
    return XYZ(x=x, y=y, z=z, white="D65", alpha=xyz.alpha)


def _f_lab(t: float) -> float:
    """Lab forward transform."""
    return _cbrt(t) if t > EPSILON else (KAPPA * t + 16) / 116


def xyz_d50_to_lab(xyz: XYZ) -> Lab:
    fx = _f_lab(xyz.x / WHITE_D50[0])
    fy = _f_lab(xyz.y / WHITE_D50[1])
    fz = _f_lab(xyz.z / WHITE_D50[2])
    return Lab(l=116 * fy - 16, a=500 * (fx - fy), b=200 * (fy - fz), alpha=xyz.alpha)


def lab_to_xyz_d50(lab: Lab) -> XYZ:
    f1 = (lab.l + 16) / 116
    f0 = lab.a / 500 + f1
    f2 = f1 - lab.b / 200

    xr = f0 ** 3 if f0 > EPSILON3 else (116 * f0 - 16) / KAPPA
    yr = f1 ** 3 if lab.l > KAPPA * EPSILON else lab.l / KAPPA
    zr = f2 ** 3 if f2 > EPSILON3 else (116 * f2 - 16) / KAPPA

    return XYZ(
        x=xr * WHITE_D50[0],
        y=yr * WHITE_D50[1],
        z=zr * WHITE_D50[2],
        white="D50",
        alpha=lab.alpha,
    )


def _polar(a: float, b: float) -> Tuple[float, float]:
    c = math.sqrt(a * a + b * b)
    if abs(a) < ACHROMATIC_THRESHOLD and abs(b) < ACHROMATIC_THRESHOLD:
        return c, 0.0
    return c, constrain_angle(math.degrees(math.atan2(b, a)))


def _cartesian(c: float, h: float) -> Tuple[float, float]:
    hr = math.radians(h)
    return c * math.cos(hr), c * math.sin(hr)


def lab_to_lch(lab: Lab) -> LCH:
    c, h = _polar(lab.a, lab.b)
    return LCH(l=lab.l, c=c, h=h, alpha=lab.alpha)


def lch_to_lab(lch: LCH) -> Lab:
    a, b = _cartesian(lch.c, lch.h)
    return Lab(l=lch.l, a=a, b=b, alpha=lch.alpha)


def rgb_to_lab(r: int, g: int, b: int, a: float = 1.0) -> Lab:
    return xyz_d50_to_lab(xyz_d65_to_xyz_d50(rgb_to_xyz_d65(r, g, b, a)))


def lab_to_rgb(lab: Lab) -> RGB:
    return xyz_d65_to_rgb(xyz_d50_to_xyz_d65(lab_to_xyz_d50(lab)))


def rgb_to_lch(r: int, g: int, b: int, a: float = 1.0) -> LCH:
    return lab_to_lch(rgb_to_lab(r, g, b, a))


def lch_to_rgb(lch: LCH) -> RGB:
    return lab_to_rgb(lch_to_lab(lch))


# OKLab / OKLCH ---------------------------------------------------


def xyz_d65_to_oklab(xyz: XYZ) -> OKLab:
    lms = multiply_v3_m3x3((xyz.x, xyz.y, xyz.z), XYZ_TO_LMS_M)
    lms_ = (_cbrt(lms[0]), _cbrt(lms[1]), _cbrt(lms[2]))
    L, a, b = multiply_v3_m3x3(lms_, LMS_TO_LAB_M)
    return OKLab(l=L, a=a, b=b, alpha=xyz.alpha)


def oklab_to_xyz_d65(oklab: OKLab) -> XYZ:
    lms_ = multiply_v3_m3x3((oklab.l, oklab.a, oklab.b), LAB_TO_LMS_M)
    lms = (lms_[0] ** 3, lms_[1] ** 3, lms_[2] ** 3)
    x, y, z = multiply_v3_m3x3(lms, LMS_TO_XYZ_M)
    return XYZ(x=x, y=y, z=z, white="D65", alpha=oklab.alpha)


def oklab_to_oklch(oklab: OKLab) -> OKLCH:
    c, h = _polar(oklab.a, oklab.b)
    return OKLCH(l=oklab.l, c=c, h=h, alpha=oklab.alpha)


def oklch_to_oklab(oklch: OKLCH) -> OKLab:
    a, b = _cartesian(oklch.c, oklch.h)
    return OKLab(l=oklch.l, a=a, b=b, alpha=oklch.alpha)


def rgb_to_oklab(r: int, g: int, b: int, a: float = 1.0) -> OKLab:
    return xyz_d65_to_oklab(rgb_to_xyz_d65(r, g, b, a))


def oklab_to_rgb(oklab: OKLab) -> RGB:
    return xyz_d65_to_rgb(oklab_to_xyz_d65(oklab))


def rgb_to_oklch(r: int, g: int, b: int, a: float = 1.0) -> OKLCH:
    return oklab_to_oklch(rgb_to_oklab(r, g, b, a))


def oklch_to_rgb(oklch: OKLCH) -> RGB:
    return oklab_to_rgb(oklch_to_oklab(oklch))


# CMYK ------------------------------------------------------------


def rgb_to_cmyk(r: int, g: int, b: int, a: float = 1.0) -> CMYK:
    """Subtractive model; pure black gives c = m = y = 0, k = 100."""
    R, G, B = bound_01(r, 255), bound_01(g, 255), bound_01(b, 255)
    k = 1 - max(R, G, B)
    if k >= 1:
        return CMYK(c=0.0, m=0.0, y=0.0, k=100.0, a=bound_alpha(a))

    c = (1 - R - k) / (1 - k)
    m = (1 - G - k) / (1 - k)
    y = (1 - B - k) / (1 - k)
    return CMYK(
        c=clamp(c * 100, 0, 100),
        m=clamp(m * 100, 0, 100),
        y=clamp(y * 100, 0, 100),
        k=clamp(k * 100, 0, 100),
        a=bound_alpha(a),
    )


def cmyk_to_rgb(cmyk: CMYK) -> RGB:
    c, m, y, k = cmyk.c / 100, cmyk.m / 100, cmyk.y / 100, cmyk.k / 100
    return RGB(
        r=to_byte((1 - c) * (1 - k)),
        g=to_byte((1 - m) * (1 - k)),
        b=to_byte((1 - y) * (1 - k)),
        a=cmyk.a,
    )


def rgb_to_luminance(r: int, g: int, b: int) -> float:
    """WCAG 2 relative luminance of an 8-bit sRGB color."""

    def channel(v: int) -> float:
        c = bound_01(v, 255)
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    return 0.2126 * channel(r) + 0.7152 * channel(g) + 0.0722 * channel(b)


def rgb_to_percentage_rgb(r: int, g: int, b: int, a: float = 1.0) -> PercentageRGB:
    return PercentageRGB(
        r=round(bound_01(r, 255) * 100),
        g=round(bound_01(g, 255) * 100),
        b=round(bound_01(b, 255) * 100),
        a=bound_alpha(a),
    )


# Formatting helpers ----------------------------------------------


def format_number(x: float, places: int = 0) -> str:
    """Round and print without trailing zeros: 62.80 -> '62.8', 3.0 -> '3'."""
    v = round(x, places)
    if v == 0:
        return "0"
    if places == 0 or v == int(v):
        return str(int(v))
    return f"{v:.{places}f}".rstrip("0").rstrip(".")
