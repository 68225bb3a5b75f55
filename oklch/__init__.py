"""Parse OKLCH literals and convert them to RGB, HEX, HSL and HWB notation."""

from .errors import ParseError
from .formats import TargetFormat, convert, to_hex, to_hsl, to_hwb, to_rgb
from .host import BufferHost, ColorHost, convert_at, decorate
from .models import HSL, HWB, SRGB, LinearRGB, Oklab, OKLCHColor
from .parser import parse
from .scanner import LiteralMatch, literal_at, replace_span, scan_literals

__all__ = [
    "ParseError",
    "TargetFormat",
    "convert",
    "to_hex",
    "to_hsl",
    "to_hwb",
    "to_rgb",
    "BufferHost",
    "ColorHost",
    "convert_at",
    "decorate",
    "HSL",
    "HWB",
    "SRGB",
    "LinearRGB",
    "Oklab",
    "OKLCHColor",
    "parse",
    "LiteralMatch",
    "literal_at",
    "replace_span",
    "scan_literals",
]
