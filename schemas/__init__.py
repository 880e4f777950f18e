from .requests import (
    ColorConvertRequest,
    ColorManipulateRequest,
    ColorMixRequest,
    ColorSchemeRequest,
    ContrastRequest,
)
from .responses import ColorListResponse, ContrastResponse, ErrorResponse, SuccessResponse

__all__ = [
    "ColorConvertRequest",
    "ColorManipulateRequest",
    "ColorSchemeRequest",
    "ContrastRequest",
    "ColorMixRequest",
    "SuccessResponse",
    "ColorListResponse",
    "ContrastResponse",
    "ErrorResponse",
]
