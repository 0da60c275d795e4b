"""
Scalar float helpers with IEEE‑754 results.

Python's ``float`` and ``math`` raise where the hardware would return a
special value (``1.0 / 0.0``, ``math.log(0)``, ``math.exp(1000)``,
``math.cos(inf)``, ``0.0 ** -1``).  Each helper computes with the plain
float/``math`` operation first and only on those exceptions recomputes
the same operation with numpy, whose ufuncs return ``inf``/``nan``.
"""
import logging
import math

import numpy as np

logger = logging.getLogger(__name__)

_FLOAT_ERRORS = (ZeroDivisionError, OverflowError, ValueError)


def to_float(x) -> float:
    """``float(x)``, with integers beyond the float range mapped to ±inf."""
    try:
        return float(x)
    except OverflowError:
        return math.inf if x > 0 else -math.inf


def _fallback(ufunc, *args) -> float:
    logger.debug("IEEE fallback: %s%s", ufunc.__name__, args)
    with np.errstate(all="ignore"):
        return float(ufunc(*(np.float64(a) for a in args)))


def div(num: float, den: float) -> float:
    try:
        return num / den
    except ZeroDivisionError:
        return _fallback(np.divide, num, den)


def power(base: float, exponent: float) -> float:
    try:
        return base ** exponent
    except _FLOAT_ERRORS:
        return _fallback(np.power, base, exponent)


def exp(x: float) -> float:
    try:
        return math.exp(x)
    except OverflowError:
        return _fallback(np.exp, x)


def ln(x: float) -> float:
    try:
        return math.log(x)
    except ValueError:                  # log(0) -> -inf, log(<0) -> nan
        return _fallback(np.log, x)


def cos(x: float) -> float:
    try:
        return math.cos(x)
    except ValueError:                  # cos(±inf) -> nan
        return _fallback(np.cos, x)


def sin(x: float) -> float:
    try:
        return math.sin(x)
    except ValueError:
        return _fallback(np.sin, x)


def sqrt(x: float) -> float:
    try:
        return math.sqrt(x)
    except ValueError:
        return _fallback(np.sqrt, x)
