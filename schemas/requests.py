from pydantic import BaseModel, Field
from oklch import TargetFormat

class OklchConvertRequest(BaseModel):
    code: str = Field(..., description="The OKLCH color literal to convert, e.g. oklch(70% 0.1 250)")
    target: TargetFormat = Field(..., description="The target color code format to convert to")

class OklchParseRequest(BaseModel):
    code: str = Field(..., description="The OKLCH color literal to parse")

class OklchScanRequest(BaseModel):
    text: str = Field(..., description="Source text to scan for OKLCH literals")
    target: TargetFormat = Field("rgb", description="Format each found literal is converted to")

class OklchConvertAtRequest(BaseModel):
    text: str = Field(..., description="Source text containing the literal")
    offset: int = Field(..., ge=0, description="Character offset inside (or at either end of) the literal")
    target: TargetFormat = Field("rgb", description="The target color code format to convert to")
