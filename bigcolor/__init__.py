"""
bigcolor - color parsing, conversion and manipulation

Colors are stored as OKLCH + alpha and converted on demand to sRGB, HSL,
HSV/HSB, HWB, CMYK, XYZ, CIE Lab/LCH and OKLab.

Example:
    >>> from bigcolor import BigColor, parse, get_contrast_ratio
    >>>
    >>> red = parse("hsl(0, 100%, 50%)")
    >>> red.to_hex_string()
    '#ff0000'
    >>> get_contrast_ratio(BigColor("black"), BigColor("white"))
    21.0
    >>> BigColor("not-a-color").is_valid()
    False
"""

__version__ = "0.1.0"

from bigcolor.accessibility import (
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
from bigcolor.color import BigColor
from bigcolor.errors import (
    EmptyColorString,
    InvalidCmykColor,
    InvalidColorFunction,
    InvalidFunction,
    InvalidGradient,
    InvalidHexColor,
    InvalidHslColor,
    InvalidHsvColor,
    InvalidHwb,
    InvalidLabColor,
    InvalidNamedColor,
    InvalidNumberFormat,
    InvalidRgbColor,
    InvalidUnknown,
    InvalidValue,
    InvalidXyzColor,
    ParseColorError,
    UnsupportedConversion,
)
from bigcolor.gradient import ColorStop, Gradient, GradientExtend, GradientType, Paint
from bigcolor.interop import (
    RGBA8,
    from_external_color,
    from_rgba8,
    get_external_color,
    to_external_color,
    to_rgba8,
)
from bigcolor.parser import ColorKind, ParsedColor, parse, parse_input, parsed_to_rgb
from bigcolor.spaces import (
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

__all__ = [
    "__version__",
    # Canonical type
    "BigColor",
    "parse",
    "parse_input",
    "parsed_to_rgb",
    "ParsedColor",
    "ColorKind",
    "ColorFormat",
    # Value models
    "RGB",
    "PercentageRGB",
    "HSL",
    "HSV",
    "HWB",
    "CMYK",
    "XYZ",
    "Lab",
    "LCH",
    "OKLab",
    "OKLCH",
    # Accessibility and mixing
    "get_luminance",
    "get_contrast_ratio",
    "get_contrast_color",
    "readability",
    "is_readable",
    "most_readable",
    "WCAG2Params",
    "WCAG2Level",
    "WCAG2Size",
    "mix",
    "equals",
    "random",
    # Gradients
    "ColorStop",
    "Gradient",
    "GradientType",
    "GradientExtend",
    "Paint",
    # Interop
    "RGBA8",
    "to_rgba8",
    "from_rgba8",
    "to_external_color",
    "from_external_color",
    "get_external_color",
    # Errors
    "ParseColorError",
    "EmptyColorString",
    "InvalidHexColor",
    "InvalidRgbColor",
    "InvalidHslColor",
    "InvalidHsvColor",
    "InvalidHwb",
    "InvalidNamedColor",
    "InvalidCmykColor",
    "InvalidLabColor",
    "InvalidXyzColor",
    "InvalidColorFunction",
    "InvalidFunction",
    "InvalidNumberFormat",
    "InvalidGradient",
    "InvalidValue",
    "InvalidUnknown",
    "UnsupportedConversion",
]
