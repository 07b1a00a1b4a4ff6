# mediaprobe/domain/scalars.py
"""
Decoders for ffprobe values whose JSON encoding does not match their meaning:
rationals written as "N/D" text, durations written as decimal-second text, and
numbers that ffprobe quotes in some versions and not in others.
"""
from __future__ import annotations

import math
from datetime import timedelta
from decimal import Decimal, InvalidOperation
from fractions import Fraction
from typing import Annotated, Any, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict

from mediaprobe.domain.errors import ShapeError


class Ratio(BaseModel):
    """
    Exact rational as ffprobe prints it. Never reduced; a zero denominator is
    ffprobe's way of saying "undefined" (e.g. r_frame_rate "0/0") and is kept.
    """
    numerator: int
    denominator: int

    model_config = ConfigDict(frozen=True)

    @property
    def is_defined(self) -> bool:
        return self.denominator != 0

    def to_fraction(self) -> Fraction:
        # raises ZeroDivisionError for undefined ratios
        return Fraction(self.numerator, self.denominator)

    def as_float(self) -> Optional[float]:
        if not self.is_defined:
            return None
        return self.numerator / self.denominator

    def __float__(self) -> float:
        return float(self.to_fraction())

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"


def _parse_int_text(s: str) -> int:
    s = s.strip()
    # int() would also accept "1_000"
    if not s or "_" in s:
        raise ValueError(s)
    return int(s)


def parse_ratio(text: str, sep: str = "/") -> Ratio:
    """
    Parse "N/D" into a Ratio. Exactly one separator, integer halves.
    Aspect ratios use ":" as the separator ("16:9").
    """
    if not isinstance(text, str):
        raise ShapeError(f"expected ratio text, got {type(text).__name__}", text=text)
    parts = text.split(sep)
    if len(parts) != 2:
        raise ShapeError(f"invalid ratio {text!r}", text=text)
    try:
        num, den = (_parse_int_text(p) for p in parts)
    except ValueError:
        raise ShapeError(f"invalid ratio {text!r}", text=text) from None
    return Ratio(numerator=num, denominator=den)


def _coerce_ratio(value: Any, sep: str) -> Any:
    if value is None or isinstance(value, Ratio):
        return value
    if isinstance(value, bool):
        raise ShapeError("boolean is not a ratio", text=value)
    if isinstance(value, (int, float)):
        # bare JSON number in place of "N/D"
        if isinstance(value, float) and not math.isfinite(value):
            raise ShapeError(f"invalid ratio {value!r}", text=value)
        frac = Fraction(str(value))
        return Ratio(numerator=frac.numerator, denominator=frac.denominator)
    if isinstance(value, dict):
        return value
    return parse_ratio(value, sep)


def parse_duration(value: Any) -> Optional[timedelta]:
    """
    Decimal seconds -> timedelta. Absent means "no duration", not an error.
    Negative values are clamped to zero: ffprobe emits tiny negative start
    times (-0.001, -0.021333) from timestamp rounding.
    """
    if value is None:
        return None
    if isinstance(value, timedelta):
        return max(value, timedelta(0))
    if isinstance(value, bool):
        raise ShapeError("boolean is not a duration", text=value)
    try:
        seconds = Decimal(value.strip() if isinstance(value, str) else str(value))
    except (ArithmeticError, TypeError, ValueError):
        raise ShapeError(f"invalid duration {value!r}", text=value) from None
    if not seconds.is_finite():
        raise ShapeError(f"invalid duration {value!r}", text=value)
    if seconds < 0:
        seconds = Decimal(0)
    try:
        micros = int((seconds * 1_000_000).to_integral_value())
        return timedelta(microseconds=micros)
    except ArithmeticError:
        raise ShapeError(f"duration out of range {value!r}", text=value) from None


def flex_int(value: Any) -> Any:
    """Accept 1920, "1920" and "1920.0" alike; None passes through."""
    if value is None or isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, bool):
        raise ShapeError("boolean is not an integer", text=value)
    if isinstance(value, float):
        if not value.is_integer():
            raise ShapeError(f"expected an integer, got {value!r}", text=value)
        return int(value)
    if isinstance(value, str):
        s = value.strip()
        try:
            return _parse_int_text(s)
        except ValueError:
            pass
        try:
            d = Decimal(s)
        except InvalidOperation:
            raise ShapeError(f"expected an integer, got {value!r}", text=value) from None
        if not d.is_finite() or d != d.to_integral_value():
            raise ShapeError(f"expected an integer, got {value!r}", text=value)
        return int(d)
    raise ShapeError(f"expected an integer, got {type(value).__name__}", text=value)


def flex_str(value: Any) -> Any:
    """ffprobe quotes some scalars ("true", "4") only in some versions."""
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    raise ShapeError(f"expected a scalar, got {type(value).__name__}", text=value)


def flex_float(value: Any) -> Any:
    if value is None:
        return value
    if isinstance(value, bool):
        raise ShapeError("boolean is not a number", text=value)
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            raise ShapeError(f"expected a number, got {value!r}", text=value) from None
    raise ShapeError(f"expected a number, got {type(value).__name__}", text=value)


FlexInt = Annotated[int, BeforeValidator(flex_int)]
FlexFloat = Annotated[float, BeforeValidator(flex_float)]
FlexStr = Annotated[str, BeforeValidator(flex_str)]
Duration = Annotated[timedelta, BeforeValidator(parse_duration)]
RatioField = Annotated[Ratio, BeforeValidator(lambda v: _coerce_ratio(v, "/"))]
AspectRatio = Annotated[Ratio, BeforeValidator(lambda v: _coerce_ratio(v, ":"))]
