"""
Color tool endpoints. Each one is also exposed as an MCP tool under its
``operation_id``.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from bigcolor import (
    BigColor,
    ColorFormat,
    ParseColorError,
    WCAG2Params,
    get_contrast_ratio,
    is_readable,
    mix,
    parse,
)
from bigcolor.config import Settings, get_settings
from schemas.requests import (
    ColorConvertRequest,
    ColorManipulateRequest,
    ColorMixRequest,
    ColorSchemeRequest,
    ContrastRequest,
)
from schemas.responses import (
    ColorListResponse,
    ContrastResponse,
    ErrorResponse,
    SuccessResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

ERROR_RESPONSES = {400: {"model": ErrorResponse, "description": "Invalid color code"}}

TARGET_FORMATS = {
    "hex": ColorFormat.HEX,
    "hex8": ColorFormat.HEX8,
    "rgb": ColorFormat.RGB,
    "prgb": ColorFormat.PRGB,
    "hsl": ColorFormat.HSL,
    "hsv": ColorFormat.HSV,
    "hsb": ColorFormat.HSB,
    "hwb": ColorFormat.HWB,
    "cmyk": ColorFormat.CMYK,
    "lab": ColorFormat.LAB,
    "lch": ColorFormat.LCH,
    "oklab": ColorFormat.OKLAB,
    "oklch": ColorFormat.OKLCH,
}


def parse_or_400(code: str) -> BigColor:
    """Parse a color code, turning parse failures into HTTP 400."""
    try:
        return parse(code)
    except ParseColorError as e:
        logger.debug("Rejected color code %r: %s", code, e)
        raise HTTPException(status_code=400, detail=str(e)) from e


@router.post(
    "/convert_color_code",
    response_model=SuccessResponse,
    responses=ERROR_RESPONSES,
    operation_id="convert_color_code",
    description="Convert a CSS color code to a target format",
)
async def parse_and_convert(request: ColorConvertRequest):
    """Parse CSS color and convert to target format."""
    color = parse_or_400(request.code)

    if request.target == "named":
        name = color.to_name()
        if name is None:
            raise HTTPException(status_code=400, detail=f"No named color matches {request.code}")
        return SuccessResponse(success=True, message=name)

    if request.target == "argb":
        return SuccessResponse(success=True, message=color.to_argb_hex_string())

    return SuccessResponse(success=True, message=color.to(TARGET_FORMATS[request.target]))


@router.post(
    "/manipulate_color",
    response_model=SuccessResponse,
    responses=ERROR_RESPONSES,
    operation_id="manipulate_color",
    description="Lighten, darken, saturate, desaturate, brighten, spin or greyscale a color",
)
async def manipulate_color(
    request: ColorManipulateRequest, settings: Settings = Depends(get_settings)
):
    """Apply one adjustment and answer in the input's own notation."""
    color = parse_or_400(request.code)
    amount = settings.default_amount if request.amount is None else request.amount

    op = request.operation
    if op in ("greyscale", "grayscale"):
        color.greyscale()
    elif op == "spin":
        color.spin(amount)
    else:
        getattr(color, op)(amount)

    return SuccessResponse(success=True, message=color.to_string())


@router.post(
    "/color_scheme",
    response_model=ColorListResponse,
    responses=ERROR_RESPONSES,
    operation_id="color_scheme",
    description="Generate a color harmony (analogous, triad, ...) from a base color",
)
async def color_scheme(request: ColorSchemeRequest):
    color = parse_or_400(request.code)
    scheme = request.scheme
    count = request.count

    if scheme == "analogous":
        colors = color.analogous(count or 6)
    elif scheme == "monochromatic":
        colors = color.monochromatic(count or 6)
    elif scheme == "complement":
        colors = [color.clone(), color.complement()]
    elif scheme == "split_complement":
        colors = color.split_complement()
    elif scheme == "triad":
        colors = color.triad()
    elif scheme == "tetrad":
        colors = color.tetrad()
    else:
        colors = color.polyad(count or 5)

    return ColorListResponse(success=True, colors=[c.to_hex_string() for c in colors])


@router.post(
    "/contrast_ratio",
    response_model=ContrastResponse,
    responses=ERROR_RESPONSES,
    operation_id="contrast_ratio",
    description="WCAG 2 contrast ratio between a text and a background color",
)
async def contrast_ratio(request: ContrastRequest, settings: Settings = Depends(get_settings)):
    foreground = parse_or_400(request.foreground)
    background = parse_or_400(request.background)
    params = WCAG2Params(
        level=request.level or settings.wcag_level,
        size=request.size or settings.wcag_size,
    )

    return ContrastResponse(
        success=True,
        ratio=round(get_contrast_ratio(foreground, background), 2),
        readable=is_readable(foreground, background, params),
        level=params.level.value,
        size=params.size.value,
    )


@router.post(
    "/mix_colors",
    response_model=SuccessResponse,
    responses=ERROR_RESPONSES,
    operation_id="mix_colors",
    description="Mix two colors in sRGB; amount is the share of the second color",
)
async def mix_colors(request: ColorMixRequest):
    first = parse_or_400(request.first)
    second = parse_or_400(request.second)
    mixed = mix(first, second, request.amount)
    return SuccessResponse(success=True, message=mixed.to_string(ColorFormat.HEX))
