"""
Value types flowing through the OKLCH conversion chain.
Every model is frozen: each transform builds a new one instead of mutating.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class OKLCHColor(_Frozen):
    l: float
    c: float
    h: float
    alpha: Optional[float] = None


class Oklab(_Frozen):
    l: float
    a: float
    b: float
    alpha: Optional[float] = None


class LinearRGB(_Frozen):
    r: float = Field(ge=0.0, le=1.0)
    g: float = Field(ge=0.0, le=1.0)
    b: float = Field(ge=0.0, le=1.0)
    alpha: Optional[float] = None


class SRGB(_Frozen):
    r: int = Field(ge=0, le=255)
    g: int = Field(ge=0, le=255)
    b: int = Field(ge=0, le=255)
    alpha: Optional[float] = None


class HSL(_Frozen):
    h: int
    s: float
    l: float
    alpha: Optional[float] = None


class HWB(_Frozen):
    h: int
    w: float
    b: float
    alpha: Optional[float] = None
