"""
Constant (degenerate) continuous distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

from pysatl_precise.distributions.continuous import AbstractContinuousDistribution
from pysatl_precise.distributions.sampling import CallableSampler
from pysatl_precise.exceptions import check_probability
from pysatl_precise.families.distribution import ParametricFamilyDistribution
from pysatl_precise.families.parametric_family import ParametricFamily
from pysatl_precise.families.parametrizations import Parametrization, parametrization
from pysatl_precise.families.registry import ParametricFamilyRegister
from pysatl_precise.types import FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from typing import Any

    import numpy as np

    from pysatl_precise.distributions.sampling import Sampler


class ConstantContinuousDistribution(ParametricFamilyDistribution, AbstractContinuousDistribution):
    """
    Distribution of a constant: all mass at a single point.

    The "density" is 1 at the value and 0 elsewhere; the CDF is a step from
    0 to 1 at the value (right-continuous).

    Parameters
    ----------
    value : float
        The constant.
    """

    family_name = FamilyName.CONSTANT

    def __init__(self, value: float) -> None:
        self._value = value

    @classmethod
    def of(cls, value: float) -> ConstantContinuousDistribution:
        configure_constant_family()
        return cls._from_family(value=value)

    @property
    def parameters(self) -> dict[str, Any]:
        return {"value": self._value}

    def density(self, x: float) -> float:
        return 1.0 if x == self._value else 0.0

    def log_density(self, x: float) -> float:
        return 0.0 if x == self._value else -math.inf

    def cumulative_probability(self, x: float) -> float:
        return 0.0 if x < self._value else 1.0

    def survival_probability(self, x: float) -> float:
        return 1.0 if x < self._value else 0.0

    def inverse_cumulative_probability(self, p: float) -> float:
        check_probability(p)
        return self._value

    def inverse_survival_probability(self, p: float) -> float:
        check_probability(p)
        return self._value

    @property
    def mean(self) -> float:
        return self._value

    @property
    def variance(self) -> float:
        return 0.0

    @property
    def support_lower_bound(self) -> float:
        return self._value

    @property
    def support_upper_bound(self) -> float:
        return self._value

    @property
    def _median(self) -> float:
        return self._value

    def create_sampler(self, rng: np.random.Generator) -> Sampler[float]:
        # The random source is never used
        value = self._value
        return CallableSampler(lambda: value)


def configure_constant_family() -> None:
    """
    Configure and register the Constant distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.CONSTANT):
        return

    Constant = ParametricFamily(
        name=FamilyName.CONSTANT,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["value"],
        distribution_class=ConstantContinuousDistribution,
    )
    Constant.__doc__ = ConstantContinuousDistribution.__doc__

    @parametrization(family=Constant, name="value")
    class _Value(Parametrization):
        value: float

    ParametricFamilyRegister.register(Constant)
