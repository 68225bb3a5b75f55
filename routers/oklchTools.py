"""
OKLCH parsing and conversion endpoints.
Each route carries an operation_id so fastapi_mcp exposes it as an MCP tool.
"""

import logging
from fastapi import HTTPException, APIRouter

from oklch import BufferHost, OKLCHColor, ParseError, convert, convert_at, parse, scan_literals
from schemas.requests import (
    OklchConvertRequest,
    OklchParseRequest,
    OklchScanRequest,
    OklchConvertAtRequest,
)
from schemas.responses import SuccessResponse, ParseResponse, ScannedLiteral, ScanResponse

logger = logging.getLogger(__name__)

router = APIRouter()

def parse_or_400(code: str) -> OKLCHColor:
    """Parse an OKLCH literal, mapping both failure tiers to HTTP 400."""
    try:
        color = parse(code)
    except ParseError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    if color is None:
        raise HTTPException(status_code=400, detail="Invalid OKLCH color")
    return color

@router.post("/convert_oklch_code", response_model=SuccessResponse, operation_id="convert_oklch_code", description="Convert an OKLCH color code to rgb, hex, hsl or hwb")
async def convert_oklch_code(request: OklchConvertRequest):
    """Parse an OKLCH literal and convert it to the target format."""
    color = parse_or_400(request.code)
    return SuccessResponse(success=True, message=convert(color, request.target))

@router.post("/parse_oklch_code", response_model=ParseResponse, operation_id="parse_oklch_code", description="Parse an OKLCH color code into lightness, chroma, hue and alpha")
async def parse_oklch_code(request: OklchParseRequest):
    color = parse_or_400(request.code)
    return ParseResponse(l=color.l, c=color.c, h=color.h, alpha=color.alpha)

@router.post("/scan_oklch_literals", response_model=ScanResponse, operation_id="scan_oklch_literals", description="Find every OKLCH color code in a text and convert each one")
async def scan_oklch_literals(request: OklchScanRequest):
    """Scan text for OKLCH literals; malformed ones are listed without a conversion."""
    found = []
    for match in scan_literals(request.text):
        converted = None
        try:
            color = parse(match.literal)
            if color is not None:
                converted = convert(color, request.target)
        except ParseError as exc:
            logger.info("Unparseable literal at %d: %s", match.start, exc)
        found.append(ScannedLiteral(literal=match.literal, start=match.start, end=match.end, converted=converted))
    return ScanResponse(success=True, literals=found)

@router.post("/convert_oklch_at", response_model=SuccessResponse, operation_id="convert_oklch_at", description="Replace the OKLCH color code at a text offset with the target format and return the new text")
async def convert_oklch_at(request: OklchConvertAtRequest):
    host = BufferHost(request.text)
    try:
        replacement = convert_at(host, request.text, request.offset, request.target)
    except ParseError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    if replacement is None:
        raise HTTPException(status_code=404, detail=f"No OKLCH color at offset {request.offset}")
    return SuccessResponse(success=True, message=host.text)
