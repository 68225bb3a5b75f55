"""
Terminal formatters for OKLCH colors.
Each public converter runs the shared pipeline and renders one CSS notation.
Any failure inside the chain is logged and replaced by that notation's
transparent black, so callers scanning unvalidated text never see an error.
"""

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, Dict, Literal, Optional

from .models import OKLCHColor
from .pipeline import hsl_to_hwb, oklch_to_srgb, round_half_up, srgb_to_hsl

logger = logging.getLogger(__name__)

TargetFormat = Literal["rgb", "hex", "hsl", "hwb"]

RGB_FALLBACK = "rgba(0, 0, 0, 0)"
HEX_FALLBACK = "#00000000"
HSL_FALLBACK = "hsla(0deg, 0%, 0%, 0)"
HWB_FALLBACK = "hwb(0deg 0% 100% / 0)"


def has_alpha(alpha: Optional[float]) -> bool:
    """Alpha is rendered only when present and below full opacity."""
    return alpha is not None and alpha < 1


def fixed2(x: float) -> str:
    """Two decimal places, ties away from zero on the exact binary value."""
    return str(Decimal(x).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def percent(x: float) -> int:
    return round_half_up(x * 100)


def hex_byte(v: float) -> str:
    return format(max(0, min(255, round_half_up(v))), "02x")


# Converters -----------------------------------------------------

def to_rgb(color: OKLCHColor) -> str:
    """Format as rgb(R, G, B) or rgba(R, G, B, A)."""
    try:
        rgb = oklch_to_srgb(color)
        if has_alpha(rgb.alpha):
            return f"rgba({rgb.r}, {rgb.g}, {rgb.b}, {fixed2(rgb.alpha)})"
        return f"rgb({rgb.r}, {rgb.g}, {rgb.b})"
    except Exception as exc:
        logger.warning("Error converting to RGB: %s", exc)
        return RGB_FALLBACK


def to_hex(color: OKLCHColor) -> str:
    """Format as #rrggbb or #rrggbbaa."""
    try:
        rgb = oklch_to_srgb(color)
        base = f"#{hex_byte(rgb.r)}{hex_byte(rgb.g)}{hex_byte(rgb.b)}"
        if has_alpha(rgb.alpha):
            return base + hex_byte(round_half_up(rgb.alpha * 255))
        return base
    except Exception as exc:
        logger.warning("Error converting to HEX: %s", exc)
        return HEX_FALLBACK


def to_hsl(color: OKLCHColor) -> str:
    """Format as hsl(Hdeg, S%, L%) or hsla(Hdeg, S%, L%, A)."""
    try:
        hsl = srgb_to_hsl(oklch_to_srgb(color))
        s, l = percent(hsl.s), percent(hsl.l)
        if has_alpha(hsl.alpha):
            return f"hsla({hsl.h}deg, {s}%, {l}%, {fixed2(hsl.alpha)})"
        return f"hsl({hsl.h}deg, {s}%, {l}%)"
    except Exception as exc:
        logger.warning("Error converting to HSL: %s", exc)
        return HSL_FALLBACK


def to_hwb(color: OKLCHColor) -> str:
    """Format as hwb(Hdeg W% B%) or hwb(Hdeg W% B% / A)."""
    try:
        hwb = hsl_to_hwb(srgb_to_hsl(oklch_to_srgb(color)))
        w, b = percent(hwb.w), percent(hwb.b)
        if has_alpha(hwb.alpha):
            return f"hwb({hwb.h}deg {w}% {b}% / {fixed2(hwb.alpha)})"
        return f"hwb({hwb.h}deg {w}% {b}%)"
    except Exception as exc:
        logger.warning("Error converting to HWB: %s", exc)
        return HWB_FALLBACK


FORMATTERS: Dict[str, Callable[[OKLCHColor], str]] = {
    "rgb": to_rgb,
    "hex": to_hex,
    "hsl": to_hsl,
    "hwb": to_hwb,
}


def convert(color: OKLCHColor, target: TargetFormat) -> str:
    """Dispatch to the converter for target."""
    try:
        formatter = FORMATTERS[target]
    except KeyError:
        raise ValueError(f"Unsupported target format: {target!r}") from None
    return formatter(color)
