"""
OKLCH literal parsing.
Grammar: oklch( <L> <C> <H> [ / <A> ] ), with L, H and A allowing a trailing %.
A literal that does not match yields None; the caller is expected to probe
arbitrary substrings, so no-match is silent.
"""

import re
from typing import Optional

from .errors import ParseError
from .models import OKLCHColor

# Regular expression patterns
ws = r"\s*"
num = r"[0-9.]+"
perc = f"{num}%?"

OKLCH_RE = re.compile(
    f"oklch\\({ws}({perc})\\s+({num})\\s+({perc})(?:{ws}/{ws}({perc}))?{ws}\\)",
    re.IGNORECASE,
)


def clamp(v: float, lo: float, hi: float) -> float:
    """Clamp value between lo and hi."""
    return max(lo, min(hi, v))


def _number(token: str, literal: str) -> float:
    try:
        return float(token.rstrip("%"))
    except ValueError:
        raise ParseError(token, literal) from None


def _fraction(token: str, literal: str) -> float:
    """Percentages are scaled to a fraction, bare decimals are taken as-is."""
    v = _number(token, literal)
    return v / 100 if token.endswith("%") else v


def parse(text: str) -> Optional[OKLCHColor]:
    """Parse the first oklch() literal found in text."""
    m = OKLCH_RE.search(text)
    if not m:
        return None
    literal = m.group(0)
    L_val, C_val, h_val, a_val = m.groups()
    return OKLCHColor(
        l=clamp(_fraction(L_val, literal), 0, 1),
        c=_number(C_val, literal),
        h=_number(h_val, literal),
        alpha=1 if a_val is None else _fraction(a_val, literal),
    )
