from pydantic import BaseModel, Field
from typing import List, Optional

class SuccessResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None

class ErrorResponse(BaseModel):
    success: bool = False
    detail: str

class ParseResponse(BaseModel):
    l: float = Field(..., description="Lightness in [0, 1]")
    c: float = Field(..., description="Chroma")
    h: float = Field(..., description="Hue in degrees, not normalized")
    alpha: float = Field(..., description="Opacity, 1 when the literal has none")

class ScannedLiteral(BaseModel):
    literal: str
    start: int
    end: int
    converted: Optional[str] = None

class ScanResponse(BaseModel):
    success: bool = True
    literals: List[ScannedLiteral] = Field(default_factory=list)
