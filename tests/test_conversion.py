"""Tests for the pure color-space conversion functions."""

import itertools
import math

import pytest

from bigcolor.conversion import (
    bound_01,
    bound_alpha,
    clamp_01,
    cmyk_to_rgb,
    format_number,
    hex_to_rgb,
    hsl_to_rgb,
    hsv_to_rgb,
    hwb_to_rgb,
    lab_to_lch,
    lab_to_rgb,
    lch_to_lab,
    linear_to_srgb,
    oklab_to_rgb,
    oklch_to_rgb,
    rgb_to_cmyk,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_hsv,
    rgb_to_hwb,
    rgb_to_lab,
    rgb_to_lch,
    rgb_to_luminance,
    rgb_to_oklab,
    rgb_to_oklch,
    rgb_to_percentage_rgb,
    rgb_to_xyz_d65,
    rgba_to_argb_hex,
    rgba_to_hex,
    srgb_to_linear,
    to_byte,
    xyz_d50_to_xyz_d65,
    xyz_d65_to_xyz_d50,
)
from bigcolor.spaces import CMYK, HSL, HSV, HWB, LCH, Lab, OKLab

CHANNELS = (0, 51, 102, 153, 204, 255)


class TestHelpers:
    @pytest.mark.parametrize("value", [math.nan, -0.1, 1.5, None])
    def test_bound_alpha_rejects(self, value):
        assert bound_alpha(value) == 1.0

    @pytest.mark.parametrize("value", [0.0, 0.3, 1.0])
    def test_bound_alpha_keeps(self, value):
        assert bound_alpha(value) == value

    def test_clamp_and_bound(self):
        assert clamp_01(-2) == 0.0
        assert clamp_01(2) == 1.0
        assert bound_01(510, 255) == 1.0
        assert bound_01(51, 255) == pytest.approx(0.2)

    def test_to_byte(self):
        assert to_byte(0.0) == 0
        assert to_byte(1.0) == 255
        assert to_byte(1.7) == 255
        assert to_byte(-0.2) == 0
        assert to_byte(math.nan) == 0

    @pytest.mark.parametrize(
        "value,places,expected",
        [(62.8, 1, "62.8"), (3.0, 0, "3"), (0.25, 2, "0.25"), (-0.0001, 2, "0"), (0.5, 2, "0.5"), (12.0, 2, "12")],
    )
    def test_format_number(self, value, places, expected):
        assert format_number(value, places) == expected


class TestCompanding:
    def test_endpoints(self):
        assert srgb_to_linear(0.0) == 0.0
        assert srgb_to_linear(1.0) == pytest.approx(1.0)
        assert linear_to_srgb(0.0) == 0.0
        assert linear_to_srgb(1.0) == pytest.approx(1.0)

    def test_linear_segment(self):
        assert srgb_to_linear(0.04) == pytest.approx(0.04 / 12.92)
        assert linear_to_srgb(0.003) == pytest.approx(0.003 * 12.92)

    @pytest.mark.parametrize("c", [0.01, 0.2, 0.5, 0.8, 0.99])
    def test_inverse(self, c):
        assert linear_to_srgb(srgb_to_linear(c)) == pytest.approx(c)


class TestHslHsv:
    """HSL/HSV conversions with hue in degrees and fractional s/l/v."""

    def test_primary_hues(self):
        assert rgb_to_hsl(255, 0, 0).h == 0
        assert rgb_to_hsl(0, 255, 0).h == pytest.approx(120)
        assert rgb_to_hsl(0, 0, 255).h == pytest.approx(240)

    def test_red_hsl(self):
        hsl = rgb_to_hsl(255, 0, 0)
        assert (hsl.s, hsl.l) == (1.0, 0.5)

    def test_gray_is_achromatic(self):
        hsl = rgb_to_hsl(128, 128, 128)
        assert hsl.s == 0
        assert hsl.h == 0

    @pytest.mark.parametrize("v", range(0, 256, 17))
    def test_gray_round_trip(self, v):
        """Achromatic grays survive HSL and HSV exactly."""
        rgb = hsl_to_rgb(rgb_to_hsl(v, v, v))
        assert (rgb.r, rgb.g, rgb.b) == (v, v, v)
        rgb = hsv_to_rgb(rgb_to_hsv(v, v, v))
        assert (rgb.r, rgb.g, rgb.b) == (v, v, v)

    def test_hsl_to_rgb(self):
        green = hsl_to_rgb(HSL(h=120, s=1, l=0.5))
        assert (green.r, green.g, green.b) == (0, 255, 0)
        cyan = hsl_to_rgb(HSL(h=180, s=1, l=0.5))
        assert (cyan.r, cyan.g, cyan.b) == (0, 255, 255)

    def test_hsv(self):
        hsv = rgb_to_hsv(255, 0, 0)
        assert (hsv.h, hsv.s, hsv.v) == (0, 1, 1)
        assert rgb_to_hsv(0, 0, 0).s == 0
        green = hsv_to_rgb(HSV(h=120, s=1, v=1))
        assert (green.r, green.g, green.b) == (0, 255, 0)

    def test_alpha_is_carried(self):
        assert rgb_to_hsl(10, 20, 30, 0.25).a == 0.25
        assert hsl_to_rgb(HSL(h=0, s=1, l=0.5, a=0.4)).a == 0.4

    @pytest.mark.parametrize("rgb", list(itertools.product(CHANNELS, repeat=3))[::7])
    def test_round_trip(self, rgb):
        back = hsl_to_rgb(rgb_to_hsl(*rgb))
        assert all(abs(a - b) <= 1 for a, b in zip((back.r, back.g, back.b), rgb))
        back = hsv_to_rgb(rgb_to_hsv(*rgb))
        assert all(abs(a - b) <= 1 for a, b in zip((back.r, back.g, back.b), rgb))


class TestHwb:
    def test_red(self):
        hwb = rgb_to_hwb(255, 0, 0)
        assert (hwb.h, hwb.w, hwb.b) == (0, 0, 0)

    def test_tinted(self):
        rgb = hwb_to_rgb(HWB(h=0, w=0.2, b=0.2))
        assert (rgb.r, rgb.g, rgb.b) == (204, 51, 51)

    def test_overflow_gives_gray(self):
        rgb = hwb_to_rgb(HWB(h=200, w=0.6, b=0.6))
        assert rgb.r == rgb.g == rgb.b == 128


class TestCmyk:
    def test_black_degeneracy(self):
        cmyk = rgb_to_cmyk(0, 0, 0, 1.0)
        assert (cmyk.c, cmyk.m, cmyk.y, cmyk.k) == (0, 0, 0, 100)

    def test_red(self):
        cmyk = rgb_to_cmyk(255, 0, 0)
        assert (cmyk.c, cmyk.m, cmyk.y, cmyk.k) == (0, 100, 100, 0)
        rgb = cmyk_to_rgb(CMYK(c=0, m=100, y=100, k=0))
        assert (rgb.r, rgb.g, rgb.b) == (255, 0, 0)

    def test_half_key(self):
        rgb = cmyk_to_rgb(CMYK(c=0, m=0, y=0, k=50))
        assert rgb.r == rgb.g == rgb.b == 128


class TestHex:
    def test_encode(self):
        assert rgb_to_hex(255, 0, 0) == "ff0000"
        assert rgb_to_hex(255, 0, 0, True) == "f00"
        assert rgb_to_hex(0x12, 0x34, 0x56, True) == "123456"
        assert rgb_to_hex(26, 110, 245) == "1a6ef5"

    def test_encode_alpha(self):
        assert rgba_to_hex(255, 0, 0, 1.0) == "ff0000ff"
        assert rgba_to_hex(255, 0, 0, 1.0, True) == "f00f"
        assert rgba_to_argb_hex(255, 0, 0, 0.5) == "80ff0000"

    @pytest.mark.parametrize("text", ["#f00", "f00", "#FF0000", "ff0000"])
    def test_decode(self, text):
        rgb = hex_to_rgb(text)
        assert (rgb.r, rgb.g, rgb.b, rgb.a) == (255, 0, 0, 1.0)

    def test_decode_alpha(self):
        assert hex_to_rgb("#ff000080").a == pytest.approx(128 / 255)
        assert hex_to_rgb("#f008").a == pytest.approx(0x88 / 255)

    @pytest.mark.parametrize("text", ["#12345", "#ggg", "", "#"])
    def test_decode_invalid(self, text):
        assert hex_to_rgb(text) is None


class TestCieLab:
    """XYZ, Lab and LCH with D50 adaptation."""

    def test_red_xyz(self):
        xyz = rgb_to_xyz_d65(255, 0, 0)
        assert xyz.x == pytest.approx(0.4124, abs=1e-4)
        assert xyz.y == pytest.approx(0.2126, abs=1e-4)
        assert xyz.white == "D65"

    def test_xyz_white_tags(self):
        d50 = xyz_d65_to_xyz_d50(rgb_to_xyz_d65(10, 200, 30))
        assert d50.white == "D50"
        assert xyz_d50_to_xyz_d65(d50).white == "D65"

    def test_white_lab(self):
        lab = rgb_to_lab(255, 255, 255)
        assert lab.l == pytest.approx(100, abs=0.01)
        assert lab.a == pytest.approx(0, abs=0.05)
        assert lab.b == pytest.approx(0, abs=0.05)

    def test_red_lab(self):
        lab = rgb_to_lab(255, 0, 0)
        assert lab.l == pytest.approx(54.29, abs=0.5)
        assert lab.a == pytest.approx(80.8, abs=0.5)
        assert lab.b == pytest.approx(69.9, abs=0.5)

    def test_red_lch(self):
        lch = rgb_to_lch(255, 0, 0)
        assert lch.c == pytest.approx(106.8, abs=0.5)
        assert lch.h == pytest.approx(40.9, abs=0.5)

    def test_achromatic_hue(self):
        lch = lab_to_lch(Lab(l=50, a=0, b=0))
        assert lch.c == 0
        assert lch.h == 0

    def test_lch_round_trip(self):
        lab = lch_to_lab(LCH(l=60, c=40, h=300))
        lch = lab_to_lch(lab)
        assert lch.c == pytest.approx(40)
        assert lch.h == pytest.approx(300)

    def test_lab_to_rgb(self):
        rgb = lab_to_rgb(rgb_to_lab(12, 180, 90))
        assert all(abs(a - b) <= 1 for a, b in zip((rgb.r, rgb.g, rgb.b), (12, 180, 90)))


class TestOkLab:
    def test_red(self):
        oklab = rgb_to_oklab(255, 0, 0)
        assert oklab.l == pytest.approx(0.62796, abs=1e-3)
        assert oklab.a == pytest.approx(0.22486, abs=1e-3)
        assert oklab.b == pytest.approx(0.12585, abs=1e-3)

    def test_red_oklch(self):
        oklch = rgb_to_oklch(255, 0, 0)
        assert oklch.l == pytest.approx(0.628, abs=1e-3)
        assert oklch.c == pytest.approx(0.2577, abs=1e-3)
        assert oklch.h == pytest.approx(29.23, abs=0.1)

    def test_white(self):
        oklab = rgb_to_oklab(255, 255, 255)
        assert oklab.l == pytest.approx(1.0, abs=1e-3)
        assert oklab.a == pytest.approx(0.0, abs=1e-3)
        assert oklab.b == pytest.approx(0.0, abs=1e-3)

    def test_black(self):
        oklch = rgb_to_oklch(0, 0, 0)
        assert (oklch.l, oklch.c, oklch.h) == (0, 0, 0)

    def test_oklab_to_rgb(self):
        rgb = oklab_to_rgb(OKLab(l=1.0, a=0.0, b=0.0))
        assert (rgb.r, rgb.g, rgb.b) == (255, 255, 255)

    @pytest.mark.parametrize("rgb", list(itertools.product(CHANNELS, repeat=3)))
    @pytest.mark.parametrize("alpha", [0.0, 0.5, 1.0])
    def test_round_trip(self, rgb, alpha):
        """RGB -> OKLCH -> RGB within one step per channel."""
        back = oklch_to_rgb(rgb_to_oklch(*rgb, alpha))
        assert all(abs(a - b) <= 1 for a, b in zip((back.r, back.g, back.b), rgb))
        assert back.a == pytest.approx(alpha, abs=0.01)


class TestMisc:
    def test_percentage_rgb(self):
        p = rgb_to_percentage_rgb(255, 128, 0)
        assert (p.r, p.g, p.b) == (100, 50, 0)

    def test_luminance(self):
        assert rgb_to_luminance(255, 255, 255) == pytest.approx(1.0)
        assert rgb_to_luminance(0, 0, 0) == 0.0
