"""Errors raised while parsing color strings."""


class ParseColorError(ValueError):
    """Base class for every color parsing failure."""

    message = "Invalid color"

    def __init__(self, detail: str = ""):
        self.detail = detail
        super().__init__(f"{self.message}: {detail}" if detail else self.message)


class EmptyColorString(ParseColorError):
    message = "Empty color string"


class InvalidHexColor(ParseColorError):
    message = "Invalid hex color format"


class InvalidRgbColor(ParseColorError):
    message = "Invalid RGB color format"


class InvalidHslColor(ParseColorError):
    message = "Invalid HSL color format"


class InvalidHsvColor(ParseColorError):
    message = "Invalid HSV color format"


class InvalidHwb(ParseColorError):
    message = "Invalid HWB color format"


class InvalidNamedColor(ParseColorError):
    message = "Invalid color name"


class InvalidCmykColor(ParseColorError):
    message = "Invalid CMYK color format"


class InvalidLabColor(ParseColorError):
    message = "Invalid LAB color format"


class InvalidXyzColor(ParseColorError):
    message = "Invalid XYZ color format"


class InvalidColorFunction(ParseColorError):
    message = "Invalid CSS color function"


class InvalidFunction(ParseColorError):
    message = "Invalid CSS function"


class InvalidNumberFormat(ParseColorError):
    """A component that should be numeric is not; ``__cause__`` holds the float error."""

    message = "Invalid number format"


class InvalidGradient(ParseColorError):
    message = "Invalid gradient format"


class InvalidValue(ParseColorError):
    message = "Invalid value"


class InvalidUnknown(ParseColorError):
    message = "Invalid unknown format"


class UnsupportedConversion(TypeError):
    """A gradient was used where a solid color is required."""
