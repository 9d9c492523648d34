"""
Numeric constants shared by the distribution formulas.

Every constant is the IEEE ``double`` nearest to the exact value; some of them
differ by 1 ULP from the naive expression evaluated with ``math``.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

ROOT_TWO = 1.4142135623730951
"""sqrt(2)."""

LN_TWO = 0.6931471805599453
"""ln(2)."""

HALF_LOG_TWO_PI = 0.9189385332046728
"""0.5 * ln(2 pi)."""

SQRT_TWO_PI_DIGITS = "2.506628274631000502415765284811045253006986740609938316629923576"
"""sqrt(2 pi) to 64 significant digits."""

INT_MIN = -(2**31)
"""Stand-in for negative infinity as a discrete support bound."""

INT_MAX = 2**31 - 1
"""Stand-in for positive infinity as a discrete support bound."""

__all__ = [
    "ROOT_TWO",
    "LN_TWO",
    "HALF_LOG_TWO_PI",
    "SQRT_TWO_PI_DIGITS",
    "INT_MIN",
    "INT_MAX",
]
