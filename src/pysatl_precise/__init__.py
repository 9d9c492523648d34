"""
PySATL Precise
==============

Numerically robust probability distributions: compensated floating-point
arithmetic, a distribution contract with accuracy-aware defaults, and a set
of built-in parametric families.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .distributions import *
from .distributions import __all__ as _distr_all
from .exceptions import *
from .exceptions import __all__ as _exceptions_all
from .families import *
from .families import __all__ as _family_all
from .numerics.extended_precision import expmhxx, sqrt2xx, xsqrt2pi
from .types import *
from .types import __all__ as _types_all

__version__ = version("pysatl-precise")
__all__ = [
    "__version__",
    "sqrt2xx",
    "xsqrt2pi",
    "expmhxx",
    *_distr_all,
    *_exceptions_all,
    *_family_all,
    *_types_all,
]

del _distr_all
del _exceptions_all
del _family_all
del _types_all
