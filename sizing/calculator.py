# sizing/calculator.py - point -> contract size (pure, no UI)

from __future__ import annotations

import logging
import re
from decimal import ROUND_HALF_UP, Decimal, localcontext

import numpy as np

from config.instruments import Mode
from config.settings import RISK_BUDGET
from errors import InvalidInput

logger = logging.getLogger(__name__)

# Leading float literal; anything after it is ignored
_FLOAT_PREFIX = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII)

_ONE_DECIMAL = Decimal("0.1")

# toFixed switches to plain number formatting from here on
_FIXED_LIMIT = 1e21


def parse_point(text: str) -> float:
    """
    Lenient float parse: leading whitespace is skipped and trailing junk is
    ignored ("12.5pts" -> 12.5). Raises InvalidInput when no number is found.
    """
    m = _FLOAT_PREFIX.match((text or "").lstrip())
    if m is None:
        raise InvalidInput(text)
    value = float(m.group(0))
    if np.isnan(value):
        raise InvalidInput(text)
    return value


def calculate(mode: Mode, point_text: str) -> float:
    """
    result = RISK_BUDGET / (point * divisor[mode])

    Zero is the only numeric value rejected. Negative and infinite points
    go through unchanged.
    """
    try:
        point = parse_point(point_text)
    except InvalidInput:
        logger.debug("Rejected point text %r", point_text)
        raise
    if point == 0:
        logger.debug("Rejected zero point %r", point_text)
        raise InvalidInput(point_text, "point must not be zero")
    return RISK_BUDGET / (point * mode.divisor)


def format_result(value: float) -> str:
    """One decimal place, halves away from zero (matches JS toFixed(1))."""
    if np.isnan(value):
        return "NaN"
    if not np.isfinite(value):
        return "Infinity" if value > 0 else "-Infinity"
    if abs(value) >= _FIXED_LIMIT:
        return repr(float(value))
    if value == 0:
        value = 0.0  # drop the sign of -0.0
    with localcontext() as ctx:
        ctx.prec = 40
        return format(Decimal(value).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP), "f")
