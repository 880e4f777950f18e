"""
WCAG contrast and readability helpers, plus color mixing and randomness.

Contrast ratio ranges from 1:1 (no contrast) to 21:1 (black on white).
WCAG 2.1 minimums:
- AA: 4.5 for normal text, 3 for large text
- AAA: 7 for normal text, 4.5 for large text
"""

import random as _random
from enum import Enum
from typing import Optional, Sequence

from pydantic import BaseModel

from .color import BigColor
from .conversion import clamp, clamp_01


class WCAG2Level(str, Enum):
    AA = "AA"
    AAA = "AAA"


class WCAG2Size(str, Enum):
    SMALL = "small"
    LARGE = "large"


class WCAG2Params(BaseModel):
    level: WCAG2Level = WCAG2Level.AA
    size: WCAG2Size = WCAG2Size.SMALL


# Minimum contrast per (level, size)
WCAG2_THRESHOLDS = {
    (WCAG2Level.AA, WCAG2Size.SMALL): 4.5,
    (WCAG2Level.AA, WCAG2Size.LARGE): 3.0,
    (WCAG2Level.AAA, WCAG2Size.SMALL): 7.0,
    (WCAG2Level.AAA, WCAG2Size.LARGE): 4.5,
}


def get_luminance(color: BigColor) -> float:
    return color.get_luminance()


def get_contrast_ratio(color1: BigColor, color2: BigColor) -> float:
    """(L_lighter + 0.05) / (L_darker + 0.05)"""
    l1 = color1.get_luminance()
    l2 = color2.get_luminance()
    lighter, darker = (l1, l2) if l1 > l2 else (l2, l1)
    return (lighter + 0.05) / (darker + 0.05)


readability = get_contrast_ratio


def get_contrast_color(color: BigColor, intensity: float = 1.0) -> BigColor:
    """
    Text color for ``color`` used as a background.

    Light bases get black and dark bases get white; ``intensity`` (clamped
    to [0, 1]) interpolates from medium gray (0) to the extreme (1).
    """
    intensity = clamp_01(intensity)
    target = 0 if color.is_light() else 255
    v = int(128 * (1 - intensity) + target * intensity)
    return BigColor.from_rgb(v, v, v, 1.0)


def wcag2_threshold(wcag2: Optional[WCAG2Params] = None) -> float:
    params = wcag2 or WCAG2Params()
    return WCAG2_THRESHOLDS[(params.level, params.size)]


def is_readable(
    color1: BigColor, color2: BigColor, wcag2: Optional[WCAG2Params] = None
) -> bool:
    return readability(color1, color2) >= wcag2_threshold(wcag2)


def most_readable(
    base: BigColor,
    colors: Sequence[BigColor],
    include_fallback_colors: bool = False,
    wcag2: Optional[WCAG2Params] = None,
) -> BigColor:
    """
    Candidate with the highest contrast against ``base``. With
    ``include_fallback_colors``, fall back to black or white when the best
    candidate is not readable. No candidates gives black.
    """
    best = None
    best_score = 0.0
    for color in colors:
        score = readability(base, color)
        if score > best_score:
            best_score = score
            best = color

    if best is None:
        return BigColor("#000")
    if include_fallback_colors and not is_readable(base, best, wcag2):
        return most_readable(base, [BigColor("#fff"), BigColor("#000")], False, wcag2)
    return best.clone()


def mix(color1: BigColor, color2: BigColor, amount: float = 50) -> BigColor:
    """Linear sRGB-byte interpolation; ``amount`` 0 gives color1, 100 color2."""
    rgb1 = color1.to_rgb()
    rgb2 = color2.to_rgb()
    p = clamp(amount, 0, 100) / 100

    return BigColor.from_rgb(
        round((rgb2.r - rgb1.r) * p + rgb1.r),
        round((rgb2.g - rgb1.g) * p + rgb1.g),
        round((rgb2.b - rgb1.b) * p + rgb1.b),
        (rgb2.a - rgb1.a) * p + rgb1.a,
    )


def equals(color1: BigColor, color2: BigColor) -> bool:
    """Equal when both render to the same rgb string."""
    return color1.to_rgb_string() == color2.to_rgb_string()


def random() -> BigColor:
    return BigColor.from_rgb(
        _random.randint(0, 255),
        _random.randint(0, 255),
        _random.randint(0, 255),
        1.0,
    )
