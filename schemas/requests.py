from typing import Annotated, Literal, Optional

from pydantic import AfterValidator, BaseModel, Field


def _clean_color_code(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("color code must not be empty")
    return v


CssColor = Annotated[str, AfterValidator(_clean_color_code)]

ConvertTarget = Literal[
    "hex", "hex8", "rgb", "prgb", "hsl", "hsv", "hsb", "hwb",
    "cmyk", "lab", "lch", "oklab", "oklch", "named", "argb",
]

Operation = Literal[
    "lighten", "darken", "saturate", "desaturate", "brighten",
    "spin", "greyscale", "grayscale",
]

Scheme = Literal[
    "analogous", "monochromatic", "complement", "split_complement",
    "triad", "tetrad", "polyad",
]


class ColorConvertRequest(BaseModel):
    code: CssColor = Field(..., description="The CSS color code to convert")
    target: ConvertTarget = Field(..., description="The target color code format to convert to")


class ColorManipulateRequest(BaseModel):
    code: CssColor = Field(..., description="The CSS color code to adjust")
    operation: Operation = Field(..., description="The adjustment to apply")
    amount: Optional[float] = Field(
        None,
        description="Percentage for lighten/darken/saturate/desaturate/brighten, degrees for spin",
    )


class ColorSchemeRequest(BaseModel):
    code: CssColor = Field(..., description="The base CSS color code")
    scheme: Scheme = Field(..., description="The color harmony to generate")
    count: Optional[int] = Field(
        None, ge=1, le=64, description="Number of colors for analogous, monochromatic and polyad"
    )


class ContrastRequest(BaseModel):
    foreground: CssColor = Field(..., description="Text color")
    background: CssColor = Field(..., description="Background color")
    level: Optional[Literal["AA", "AAA"]] = Field(None, description="WCAG 2 conformance level")
    size: Optional[Literal["small", "large"]] = Field(None, description="Text size class")


class ColorMixRequest(BaseModel):
    first: CssColor = Field(..., description="First CSS color code")
    second: CssColor = Field(..., description="Second CSS color code")
    amount: float = Field(50.0, ge=0.0, le=100.0, description="Share of the second color in percent")
