from .requests import OklchConvertRequest, OklchParseRequest, OklchScanRequest, OklchConvertAtRequest
from .responses import SuccessResponse, ErrorResponse, ParseResponse, ScannedLiteral, ScanResponse

__all__ = [
    "OklchConvertRequest",
    "OklchParseRequest",
    "OklchScanRequest",
    "OklchConvertAtRequest",
    "SuccessResponse",
    "ErrorResponse",
    "ParseResponse",
    "ScannedLiteral",
    "ScanResponse",
]
