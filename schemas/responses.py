from typing import List

from pydantic import BaseModel, Field


class SuccessResponse(BaseModel):
    success: bool = Field(True, description="Whether the operation succeeded")
    message: str = Field(..., description="The resulting color string")


class ColorListResponse(BaseModel):
    success: bool = Field(True, description="Whether the operation succeeded")
    colors: List[str] = Field(..., description="Generated colors as hex strings")


class ContrastResponse(BaseModel):
    success: bool = Field(True, description="Whether the operation succeeded")
    ratio: float = Field(..., description="WCAG 2 contrast ratio, 1 to 21")
    readable: bool = Field(..., description="Whether the ratio meets the requested level")
    level: str
    size: str


class ErrorResponse(BaseModel):
    success: bool = Field(False, description="Always false")
    error: str = Field(..., description="What went wrong")
