"""
Extended Precision Arithmetic
=============================

Error-free transformations used to keep distribution formulas accurate at
extreme arguments.

- :func:`split` / :func:`high_part_unscaled`: Dekker's split of a double
  into two non-overlapping halves.
- :func:`product_low` / :func:`two_product`: round-off of a product.
- :func:`sqrt2xx`: ``sqrt(2 * x * x)``.
- :func:`xsqrt2pi`: ``x * sqrt(2 * pi)``.
- :func:`expmhxx`: ``exp(-0.5 * x * x)``.

Notes
-----
The functions never raise: NaN and infinities propagate with IEEE-754
semantics. Inputs of :func:`sqrt2xx` and :func:`xsqrt2pi` are assumed to be
non-negative; this is not checked.

References
----------
Dekker, T.J. (1971) A floating-point technique for extending the available
precision. Numerische Mathematik, 18, 224-242.

Shewchuk, J.R. (1997) Arbitrary Precision Floating-Point Arithmetic and Fast
Robust Geometric Predicates. Theorem 18.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from decimal import Decimal
from typing import NamedTuple

from pysatl_precise.numerics.constants import SQRT_TWO_PI_DIGITS

MULTIPLIER = 1.0 + 2.0**27
"""Dekker's split multiplier ``2^(p - p/2) + 1`` for a 53-bit significand."""

BIG = 2.0**500
"""Threshold for a number that may overflow when squared."""

SMALL = 2.0**-500
"""Threshold for a number that may underflow when squared."""

SCALE_UP = 2.0**600
SCALE_DOWN = 2.0**-600

EXP_M_HALF_XX_MAX = 1491.0
"""``exp(-0.5 * z)`` is zero for ``z`` at or above this value."""


class SplitValue(NamedTuple):
    """
    A double represented as the exact sum ``high + low``.

    Attributes
    ----------
    high : float
        Upper 26 bits of the significand.
    low : float
        Remaining bits; its sign carries one more bit of information.
    """

    high: float
    low: float


def high_part_unscaled(value: float) -> float:
    """
    Return the high part of Dekker's split of ``value``.

    ``c = M * value`` is large enough for the rounding of ``c - value`` to
    discard exactly the low bits of ``value``.

    Notes
    -----
    No scaling is applied: the result is NaN if ``M * value`` overflows
    (exponent of ``value`` above 996), or if ``value`` is NaN or infinite.
    """
    c = MULTIPLIER * value
    return c - (c - value)


def split(value: float) -> SplitValue:
    """Split ``value`` into non-overlapping high and low parts."""
    high = high_part_unscaled(value)
    return SplitValue(high, value - high)


def product_low(hx: float, lx: float, hy: float, ly: float, xy: float) -> float:
    """
    Compute the low part of the exact product of ``x`` and ``y``.

    Parameters
    ----------
    hx, lx : float
        High and low parts of the first factor.
    hy, ly : float
        High and low parts of the second factor.
    xy : float
        The standard precision product ``x * y``.

    Returns
    -------
    float
        ``lx * ly - (((xy - hx * hy) - lx * hy) - hx * ly)``, so that
        ``x * y == xy + result`` exactly.
    """
    return lx * ly - (((xy - hx * hy) - lx * hy) - hx * ly)


def square_low(hx: float, lx: float, xx: float) -> float:
    """Low part of the exact square of ``x = hx + lx`` given ``xx = x * x``."""
    return lx * lx - ((xx - hx * hx) - 2 * lx * hx)


def two_product(a: float, b: float) -> tuple[float, float]:
    """
    Error-free product.

    Returns
    -------
    tuple[float, float]
        ``(p, e)`` with ``p = fl(a * b)`` and ``a * b == p + e`` exactly
        (barring overflow of the split).
    """
    p = a * b
    ha, la = split(a)
    hb, lb = split(b)
    return p, product_low(ha, la, hb, lb, p)


def sqrt2xx(x: float) -> float:
    """
    Compute ``sqrt(2 * x * x)`` avoiding intermediate overflow and underflow.

    The result is within 1 ULP of ``x * sqrt(2)``.

    Parameters
    ----------
    x : float
        Value, assumed to be non-negative.

    Returns
    -------
    float
        ``sqrt(2 * x * x)``.
    """
    # x is not converted to its absolute value
    if x > BIG:
        if x == math.inf:
            return math.inf
        return _compute_sqrt2aa(x * SCALE_DOWN) * SCALE_UP
    if x < SMALL:
        return _compute_sqrt2aa(x * SCALE_UP) * SCALE_DOWN
    return _compute_sqrt2aa(x)


def _compute_sqrt2aa(a: float) -> float:
    ha, la = split(a)

    # Extended precision product 2 * a * a
    x = 2 * a * a
    xx = product_low(ha, la, 2 * ha, 2 * la, x)

    c = math.sqrt(x)

    # a has no lost low-order bits, including 0 and 1
    if xx == 0:
        return c

    # Dekker's double precision sqrt2 (Dekker, 1971, pp 242)
    hc, lc = split(c)
    u = c * c
    uu = product_low(hc, lc, hc, lc, u)
    cc = (x - u - uu + xx) * 0.5 / c
    return c + cc


_ROOT2PI = float(SQRT_TWO_PI_DIGITS)
# Round-off of the double nearest to sqrt(2 pi)
_ROOT2PI_R = float(Decimal(SQRT_TWO_PI_DIGITS) - Decimal(_ROOT2PI))
_ROOT2PI_H, _ROOT2PI_L = split(_ROOT2PI)


def xsqrt2pi(x: float) -> float:
    """
    Compute ``x * sqrt(2 * pi)``.

    The constant is held as a double-double so the product is accurate to
    about 1 ULP.

    Parameters
    ----------
    x : float
        Value, assumed to be non-negative.
    """
    if x > BIG:
        if x == math.inf:
            return math.inf
        return _compute_xsqrt2pi(x * SCALE_DOWN) * SCALE_UP
    if x < SMALL:
        return _compute_xsqrt2pi(x * SCALE_UP) * SCALE_DOWN
    return _compute_xsqrt2pi(x)


def _compute_xsqrt2pi(a: float) -> float:
    ha, la = split(a)
    x = a * _ROOT2PI
    xx = product_low(ha, la, _ROOT2PI_H, _ROOT2PI_L, x)
    return x + (xx + a * _ROOT2PI_R)


def expmhxx(x: float) -> float:
    """
    Compute ``exp(-0.5 * x * x)``.

    The round-off of ``x * x`` is carried into the exponent: for large ``x``
    the naive expression loses several bits because the error of the square
    is amplified by ``exp``.
    """
    z = x * x
    if z <= 0.5:
        return math.exp(-0.5 * z)
    if z >= EXP_M_HALF_XX_MAX:
        # Also covers x = +/-inf
        return 0.0
    hx, lx = split(x)
    zz = square_low(hx, lx, z)
    # exp(a + b) ~ exp(a) * (1 + b) for |b| << 1
    ea = math.exp(-0.5 * z)
    return ea + ea * (-0.5 * zz)


__all__ = [
    "SplitValue",
    "high_part_unscaled",
    "split",
    "product_low",
    "square_low",
    "two_product",
    "sqrt2xx",
    "xsqrt2pi",
    "expmhxx",
]
