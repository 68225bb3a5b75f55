"""
OKLCH -> Oklab -> linear RGB -> sRGB -> HSL -> HWB transform chain.
Each step is a pure function taking one frozen model and returning the next.
"""

import math

from .models import HSL, HWB, SRGB, LinearRGB, Oklab, OKLCHColor


def round_half_up(x: float) -> int:
    """Round to the nearest integer, ties toward +infinity."""
    return int(math.floor(x + 0.5))


def _clamp01(v: float) -> float:
    if math.isnan(v):
        raise ValueError("channel is NaN")
    return max(0.0, min(1.0, v))


# OKLCH -> Oklab -------------------------------------------------

def oklch_to_oklab(color: OKLCHColor) -> Oklab:
    """Polar to rectangular; hue periodicity makes any degree value valid."""
    if not all(math.isfinite(v) for v in (color.l, color.c, color.h)):
        raise ValueError(f"non-finite OKLCH component in {color!r}")
    hr = (color.h * math.pi) / 180
    return Oklab(
        l=color.l,
        a=color.c * math.cos(hr),
        b=color.c * math.sin(hr),
        alpha=color.alpha,
    )


# Oklab -> linear sRGB -------------------------------------------

def oklab_to_linear_rgb(lab: Oklab) -> LinearRGB:
    """OKLab -> OKLMS -> linear sRGB, clipped to [0, 1]."""
    L, a, b = lab.l, lab.a, lab.b
    l_ = L + 0.3963377774 * a + 0.2158037573 * b
    m_ = L - 0.1055613458 * a - 0.0638541728 * b
    s_ = L - 0.0894841775 * a - 1.291485548 * b

    l = l_ * l_ * l_
    m = m_ * m_ * m_
    s = s_ * s_ * s_

    R = +4.0767416621 * l - 3.3077115913 * m + 0.2309699292 * s
    G = -1.2684380046 * l + 2.6097574011 * m - 0.3413193965 * s
    B = -0.0041960863 * l - 0.7034186147 * m + 1.707614701 * s

    return LinearRGB(r=_clamp01(R), g=_clamp01(G), b=_clamp01(B), alpha=lab.alpha)


# linear -> sRGB -------------------------------------------------

def gamma_encode(x: float) -> float:
    """sRGB transfer function."""
    return 12.92 * x if x <= 0.0031308 else 1.055 * (x ** (1 / 2.4)) - 0.055


def linear_rgb_to_srgb(rgb: LinearRGB) -> SRGB:
    return SRGB(
        r=round_half_up(gamma_encode(rgb.r) * 255),
        g=round_half_up(gamma_encode(rgb.g) * 255),
        b=round_half_up(gamma_encode(rgb.b) * 255),
        alpha=rgb.alpha,
    )


def oklch_to_srgb(color: OKLCHColor) -> SRGB:
    """Shared upstream chain of every format converter."""
    return linear_rgb_to_srgb(oklab_to_linear_rgb(oklch_to_oklab(color)))


# sRGB -> HSL -> HWB ---------------------------------------------

def srgb_to_hsl(rgb: SRGB) -> HSL:
    """Convert 0-255 sRGB to HSL with an integer hue in degrees."""
    R, G, B = rgb.r / 255, rgb.g / 255, rgb.b / 255
    max_val = max(R, G, B)
    min_val = min(R, G, B)
    d = max_val - min_val
    l = (max_val + min_val) / 2
    h = 0
    s = 0.0
    if d > 0:
        s = d / (2 - max_val - min_val) if l > 0.5 else d / (max_val + min_val)
        if max_val == R:
            hp = math.fmod((G - B) / d, 6)
        elif max_val == G:
            hp = (B - R) / d + 2
        else:
            hp = (R - G) / d + 4
        h = round_half_up(hp * 60)
        if h < 0:
            h += 360
    return HSL(h=h, s=s, l=l, alpha=rgb.alpha)


def hsl_to_hwb(hsl: HSL) -> HWB:
    """Convert HSL to HWB by way of HSV; black short-circuits to w=0, b=1."""
    s, l = hsl.s, hsl.l
    if l <= 0.5:
        sv = s * (1 + (2 * l - 1))
        v = l * (1 + sv)
    else:
        sv = s * (1 - (2 * l - 1))
        v = l + sv - l * sv

    if v == 0:
        return HWB(h=hsl.h, w=0.0, b=1.0, alpha=hsl.alpha)

    return HWB(h=hsl.h, w=(1 - sv) * v, b=1 - v, alpha=hsl.alpha)
