"""
Numerics
========

Compensated floating-point arithmetic and special functions backing the
distribution formulas.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .constants import *
from .constants import __all__ as _constants_all
from .extended_precision import *
from .extended_precision import __all__ as _extended_precision_all
from .special import *
from .special import __all__ as _special_all

__all__ = [
    *_constants_all,
    *_extended_precision_all,
    *_special_all,
]

del _constants_all, _extended_precision_all, _special_all
