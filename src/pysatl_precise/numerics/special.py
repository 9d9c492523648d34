"""
Special functions used by the built-in families.

Thin wrappers over :mod:`scipy.special` returning plain ``float`` values, plus
the saddle-point helpers of Loader's algorithm for the Poisson probability
mass.

References
----------
Loader, C. (2000). Fast and Accurate Computation of Binomial Probabilities.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

from scipy import special

from pysatl_precise.numerics.constants import HALF_LOG_TWO_PI

# Stirling error at z = 0.0, 0.5, 1.0, ..., 15.0
_EXACT_STIRLING_ERRORS = (
    0.0,
    0.1534264097200273452913848,
    0.0810614667953272582196702,
    0.0548141210519176538961390,
    0.0413406959554092940938221,
    0.03316287351993628748511048,
    0.02767792568499833914878929,
    0.02374616365629749597132920,
    0.02079067210376509311152277,
    0.01848845053267318523077934,
    0.01664469118982119216319487,
    0.01513497322191737887351255,
    0.01387612882307074799874573,
    0.01281046524292022692424986,
    0.01189670994589177009505572,
    0.01110455975820691732662991,
    0.010411265261972096497478567,
    0.009799416126158803298389475,
    0.009255462182712732917728637,
    0.008768700134139385462952823,
    0.008330563433362871256469318,
    0.007934114564314020547248100,
    0.007573675487951840794972024,
    0.007244554301320383179543912,
    0.006942840107209529865664152,
    0.006665247032707682442354394,
    0.006408994188004207068439631,
    0.006171712263039457647532867,
    0.005951370112758847735624416,
    0.005746216513010115682023589,
    0.005554733551962801371038690,
)

_S0 = 0.083333333333333333333
_S1 = 0.00277777777777777777778
_S2 = 0.00079365079365079365079365
_S3 = 0.000595238095238095238095238
_S4 = 0.0008417508417508417508417508


def erfc(x: float) -> float:
    """Complementary error function."""
    return float(special.erfc(x))


def erf_difference(x0: float, x1: float) -> float:
    """
    Compute ``erf(x1) - erf(x0)``.

    When both arguments are in the same tail the difference is taken between
    complementary error functions, which keeps the relative accuracy.
    """
    if x0 > 0 and x1 > 0:
        return erfc(x0) - erfc(x1)
    if x0 < 0 and x1 < 0:
        return erfc(-x1) - erfc(-x0)
    return float(special.erf(x1) - special.erf(x0))


def inverse_erfc(p: float) -> float:
    """Inverse of :func:`erfc` on ``[0, 2]``."""
    return float(special.erfcinv(p))


def regularized_gamma_p(a: float, x: float) -> float:
    """Regularized lower incomplete gamma function ``P(a, x)``."""
    return float(special.gammainc(a, x))


def regularized_gamma_q(a: float, x: float) -> float:
    """Regularized upper incomplete gamma function ``Q(a, x) = 1 - P(a, x)``."""
    return float(special.gammaincc(a, x))


def stirling_error(z: float) -> float:
    """
    Compute the error of Stirling's series at ``z``.

    ``stirling_error(z) = log(z!) - log(sqrt(2 pi z) * (z / e)^z)``.

    Parameters
    ----------
    z : float
        Non-negative value.
    """
    if z <= 15.0:
        z2 = z + z
        if math.floor(z2) == z2:
            return _EXACT_STIRLING_ERRORS[int(z2)]
        return float(special.gammaln(z + 1.0)) - (z + 0.5) * math.log(z) + z - HALF_LOG_TWO_PI
    z2 = z * z
    return (_S0 - (_S1 - (_S2 - (_S3 - _S4 / z2) / z2) / z2) / z2) / z


def deviance_part(x: float, mu: float) -> float:
    """
    Compute the deviance term ``x * log(x / mu) + mu - x``.

    Near ``x == mu`` the expression is summed as a series in
    ``v = (x - mu) / (x + mu)`` to avoid cancellation.

    Parameters
    ----------
    x : float
        Value, ``x >= 0``.
    mu : float
        Mean, ``mu > 0``.
    """
    if abs(x - mu) < 0.1 * (x + mu):
        d = x - mu
        v = d / (x + mu)
        s1 = v * d
        s = math.nan
        ej = 2.0 * x * v
        v = v * v
        j = 1
        while s1 != s:
            s = s1
            ej *= v
            s1 = s + ej / ((j * 2) + 1)
            j += 1
        return s1
    if x == 0:
        return mu
    return x * math.log(x / mu) + mu - x


__all__ = [
    "erfc",
    "erf_difference",
    "inverse_erfc",
    "regularized_gamma_p",
    "regularized_gamma_q",
    "stirling_error",
    "deviance_part",
]
