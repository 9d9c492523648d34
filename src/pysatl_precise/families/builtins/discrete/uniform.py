"""
Discrete uniform distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

import numpy as np

from pysatl_precise.distributions.discrete import AbstractDiscreteDistribution
from pysatl_precise.distributions.sampling import CallableSampler
from pysatl_precise.families.distribution import ParametricFamilyDistribution
from pysatl_precise.families.parametric_family import ParametricFamily
from pysatl_precise.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_precise.families.registry import ParametricFamilyRegister
from pysatl_precise.numerics.constants import INT_MAX, INT_MIN
from pysatl_precise.types import FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    from typing import Any

    from pysatl_precise.distributions.sampling import Sampler


class UniformDiscreteDistribution(ParametricFamilyDistribution, AbstractDiscreteDistribution):
    """
    Discrete uniform distribution on the integers of ``[lower, upper]``.

    Parameters
    ----------
    lower : int
        Smallest value.
    upper : int
        Largest value, ``upper >= lower``. Equal bounds give a single point.
    """

    family_name = FamilyName.DISCRETE_UNIFORM

    def __init__(self, lower: int, upper: int) -> None:
        self._lower = lower
        self._upper = upper
        # Number of points, as a float
        self._n = float(upper) - float(lower) + 1.0
        self._log_probability = -math.log(self._n)

    @classmethod
    def of(cls, lower: int, upper: int) -> UniformDiscreteDistribution:
        """
        Create a discrete uniform distribution.

        Raises
        ------
        InvalidParameterError
            If a bound is not an integer, lies outside the 32-bit signed
            range, or ``lower > upper``.
        """
        configure_uniform_discrete_family()
        return cls._from_family(lower=lower, upper=upper)

    @property
    def parameters(self) -> dict[str, Any]:
        return {"lower": self._lower, "upper": self._upper}

    def point_probability(self, x: int) -> float:
        if x < self._lower or x > self._upper:
            return 0.0
        return 1.0 / self._n

    def log_probability(self, x: int) -> float:
        if x < self._lower or x > self._upper:
            return -math.inf
        return self._log_probability

    def cumulative_probability(self, x: int) -> float:
        if x < self._lower:
            return 0.0
        if x > self._upper:
            return 1.0
        return (x - self._lower + 1) / self._n

    def survival_probability(self, x: int) -> float:
        if x < self._lower:
            return 1.0
        if x >= self._upper:
            return 0.0
        return (self._upper - x) / self._n

    @property
    def mean(self) -> float:
        return 0.5 * (float(self._upper) + float(self._lower))

    @property
    def variance(self) -> float:
        return (self._n * self._n - 1.0) / 12.0

    @property
    def support_lower_bound(self) -> int:
        return self._lower

    @property
    def support_upper_bound(self) -> int:
        return self._upper

    def create_sampler(self, rng: np.random.Generator) -> Sampler[int]:
        lower, upper = self._lower, self._upper
        return CallableSampler(lambda: int(rng.integers(lower, upper, endpoint=True)))


def configure_uniform_discrete_family() -> None:
    """
    Configure and register the discrete Uniform distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.DISCRETE_UNIFORM):
        return

    UniformDiscrete = ParametricFamily(
        name=FamilyName.DISCRETE_UNIFORM,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["standard"],
        distribution_class=UniformDiscreteDistribution,
    )
    UniformDiscrete.__doc__ = UniformDiscreteDistribution.__doc__

    @parametrization(family=UniformDiscrete, name="standard")
    class _Standard(Parametrization):
        lower: int
        upper: int

        @constraint(description="lower and upper are integers")
        def check_bounds_are_integers(self) -> bool:
            return all(
                isinstance(v, int | np.integer) and not isinstance(v, bool)
                for v in (self.lower, self.upper)
            )

        @constraint(description="INT_MIN <= lower and upper <= INT_MAX")
        def check_bounds_fit_int32(self) -> bool:
            return INT_MIN <= self.lower and self.upper <= INT_MAX

        @constraint(description="lower <= upper")
        def check_lower_not_greater_than_upper(self) -> bool:
            return self.lower <= self.upper

    ParametricFamilyRegister.register(UniformDiscrete)
