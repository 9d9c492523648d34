"""
Core Type Definitions
=====================

Names and descriptors shared by the distribution contract and the families:
sample-space kinds, numeric aliases, support shapes, and the enumerations of
characteristics and built-in families.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from enum import Enum, StrEnum, auto
from typing import Any, TypeAlias

import numpy as np
from numpy.typing import NDArray


class Kind(StrEnum):
    """
    Sample space of a distribution.

    Attributes
    ----------
    DISCRETE : str
        Outcomes are integers; the point mass is ``point_probability``.
    CONTINUOUS : str
        Outcomes are reals; the point mass is replaced by ``density``.
    """

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


@dataclass(frozen=True, slots=True)
class DistributionType:
    """
    Descriptor of the sample space a family is defined on.

    Parameters
    ----------
    kind : Kind
        Discrete or continuous outcomes.
    dimension : int, default=1
        Number of coordinates of an outcome.
    """

    kind: Kind
    dimension: int = 1


UnivariateContinuous = DistributionType(Kind.CONTINUOUS)
"""Real-valued outcomes."""

UnivariateDiscrete = DistributionType(Kind.DISCRETE)
"""Integer-valued outcomes."""

NumPyNumber = np.floating[Any] | np.integer[Any]
Number = NumPyNumber | int | float
NumericArray = NDArray[NumPyNumber]
BoolArray = NDArray[np.bool_]


class ContinuousSupportShape1D(Enum):
    """
    Shape of the support of a continuous distribution.

    Finite bounds always belong to the support, infinite ones never do.

    Attributes
    ----------
    REAL_LINE
        (-∞, ∞), e.g. Normal and Laplace.
    RAY_LEFT
        (-∞, b].
    RAY_RIGHT
        [a, ∞), e.g. Exponential.
    BOUNDED_INTERVAL
        [a, b], e.g. continuous Uniform.
    SINGLE_POINT
        {a}, the Constant distribution.
    """

    REAL_LINE = auto()
    RAY_LEFT = auto()
    RAY_RIGHT = auto()
    BOUNDED_INTERVAL = auto()
    SINGLE_POINT = auto()


ParametrizationName: TypeAlias = str
"""Name of a parametrization within its family, e.g. ``"meanStd"``."""


class CharacteristicName(StrEnum):
    """
    Characteristics that can be looked up with ``query_method``.

    ``PDF``/``LOGPDF`` exist for continuous distributions only,
    ``PMF``/``LOGPMF`` for discrete ones.
    """

    PDF = "pdf"
    LOGPDF = "logpdf"
    PMF = "pmf"
    LOGPMF = "logpmf"
    CDF = "cdf"
    SF = "sf"
    PPF = "ppf"
    ISF = "isf"
    MEAN = "mean"
    VAR = "var"


class FamilyName(StrEnum):
    NORMAL = "Normal"
    LAPLACE = "Laplace"
    EXPONENTIAL = "Exponential"
    CONTINUOUS_UNIFORM = "ContinuousUniform"
    CONSTANT = "Constant"
    POISSON = "Poisson"
    DISCRETE_UNIFORM = "DiscreteUniform"


__all__ = [
    "Kind",
    "DistributionType",
    "UnivariateContinuous",
    "UnivariateDiscrete",
    "ParametrizationName",
    "ContinuousSupportShape1D",
    "BoolArray",
    "NumPyNumber",
    "Number",
    "NumericArray",
    "CharacteristicName",
    "FamilyName",
]
