"""Tests for contrast, readability and mixing."""

import pytest

from bigcolor import (
    BigColor,
    WCAG2Level,
    WCAG2Params,
    WCAG2Size,
    equals,
    get_contrast_color,
    get_contrast_ratio,
    get_luminance,
    is_readable,
    mix,
    most_readable,
    random,
    readability,
)
from bigcolor.accessibility import wcag2_threshold


class TestContrast:
    """WCAG 2 contrast ratio."""

    def test_same_color(self, red):
        assert get_contrast_ratio(red, red.clone()) == 1.0

    def test_black_on_white(self, black, white):
        assert get_contrast_ratio(black, white) == pytest.approx(21.0, abs=0.01)
        assert get_contrast_ratio(white, black) == get_contrast_ratio(black, white)

    def test_readability_alias(self, black, white):
        assert readability(black, white) == get_contrast_ratio(black, white)

    def test_luminance(self, white):
        assert get_luminance(white) == pytest.approx(1.0)
        assert get_luminance(BigColor("#777777")) == pytest.approx(0.1845, abs=1e-3)

    def test_gray_on_white(self, white):
        gray = BigColor("#777777")
        assert get_contrast_ratio(gray, white) == pytest.approx(4.48, abs=0.01)
        assert not is_readable(gray, white)
        assert is_readable(gray, white, WCAG2Params(size=WCAG2Size.LARGE))
        assert not is_readable(gray, white, WCAG2Params(level="AAA", size="large"))


class TestThresholds:
    @pytest.mark.parametrize(
        "level,size,expected",
        [
            (WCAG2Level.AA, WCAG2Size.SMALL, 4.5),
            (WCAG2Level.AA, WCAG2Size.LARGE, 3.0),
            (WCAG2Level.AAA, WCAG2Size.SMALL, 7.0),
            (WCAG2Level.AAA, WCAG2Size.LARGE, 4.5),
        ],
    )
    def test_levels(self, level, size, expected):
        assert wcag2_threshold(WCAG2Params(level=level, size=size)) == expected

    def test_default_is_aa_small(self):
        assert wcag2_threshold() == 4.5


class TestContrastColor:
    def test_extremes(self, white, black):
        assert get_contrast_color(white).to_hex_string() == "#000000"
        assert get_contrast_color(black).to_hex_string() == "#ffffff"

    def test_zero_intensity_is_medium_gray(self, white, black):
        assert get_contrast_color(white, 0).to_hex_string() == "#808080"
        assert get_contrast_color(black, 0).to_hex_string() == "#808080"

    def test_intensity_is_clamped(self, black):
        assert get_contrast_color(black, 5).to_hex_string() == "#ffffff"

    def test_partial_intensity_truncates(self, white, black):
        assert get_contrast_color(black, 0.5).to_hex_string() == "#bfbfbf"
        assert get_contrast_color(white, 0.5).to_hex_string() == "#404040"


class TestMostReadable:
    def test_picks_highest_contrast(self, white):
        candidates = [BigColor("#1a1a1a"), BigColor("#888888"), BigColor("#dddddd")]
        assert most_readable(white, candidates).to_hex_string() == "#1a1a1a"

    def test_returns_a_copy(self, white, black):
        winner = most_readable(white, [black])
        winner.lighten(50)
        assert black.to_hex_string() == "#000000"

    def test_no_candidates(self, white):
        assert most_readable(white, []).to_hex_string() == "#000000"

    def test_fallback(self):
        base = BigColor("#777777")
        candidates = [BigColor("#808080")]
        assert most_readable(base, candidates).to_hex_string() == "#808080"
        assert most_readable(base, candidates, include_fallback_colors=True).to_hex_string() == "#000000"

    def test_fallback_not_needed(self, white, black):
        assert most_readable(white, [black], include_fallback_colors=True) == black


class TestMix:
    def test_halfway(self):
        assert mix(BigColor("red"), BigColor("blue")).to_hex_string() == "#800080"

    def test_ends(self):
        red, blue = BigColor("red"), BigColor("blue")
        assert mix(red, blue, 0).to_hex_string() == "#ff0000"
        assert mix(red, blue, 100).to_hex_string() == "#0000ff"
        assert mix(red, blue, 250).to_hex_string() == "#0000ff"

    def test_alpha(self):
        clear = BigColor("transparent")
        assert mix(clear, BigColor("black")).get_alpha() == pytest.approx(0.5)


class TestMisc:
    def test_equals(self):
        assert equals(BigColor("red"), BigColor("#f00"))
        assert not equals(BigColor("red"), BigColor("rgba(255, 0, 0, 0.5)"))

    def test_random(self):
        for _ in range(10):
            color = random()
            assert color.is_valid()
            assert color.get_alpha() == 1.0
