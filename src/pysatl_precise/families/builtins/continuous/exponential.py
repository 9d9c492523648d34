"""
Exponential distribution family implementation.

Contains the Exponential family with the ``mean`` and ``rate``
parametrizations.
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
from pysatl_precise.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_precise.families.registry import ParametricFamilyRegister
from pysatl_precise.numerics.constants import LN_TWO
from pysatl_precise.types import FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from typing import Any

    import numpy as np

    from pysatl_precise.distributions.sampling import Sampler


class ExponentialDistribution(ParametricFamilyDistribution, AbstractContinuousDistribution):
    """
    Exponential distribution.

    Probability density function:
        f(x) = 1/μ * exp(-x/μ),  x >= 0

    Parameters
    ----------
    mean : float
        Mean (μ), positive.
    """

    family_name = FamilyName.EXPONENTIAL

    def __init__(self, mean: float) -> None:
        self._mean = mean
        self._log_mean = math.log(mean)

    @classmethod
    def of(cls, mean: float) -> ExponentialDistribution:
        """
        Create an exponential distribution.

        Raises
        ------
        InvalidParameterError
            If ``mean <= 0``.
        """
        configure_exponential_family()
        return cls._from_family(mean=mean)

    @property
    def parameters(self) -> dict[str, Any]:
        return {"mean": self._mean}

    def density(self, x: float) -> float:
        return math.exp(self.log_density(x))

    def log_density(self, x: float) -> float:
        if x < 0 or x == math.inf:
            return -math.inf
        return -x / self._mean - self._log_mean

    def cumulative_probability(self, x: float) -> float:
        if x <= 0:
            return 0.0
        return -math.expm1(-x / self._mean)

    def survival_probability(self, x: float) -> float:
        if x <= 0:
            return 1.0
        return math.exp(-x / self._mean)

    def inverse_cumulative_probability(self, p: float) -> float:
        check_probability(p)
        if p == 1:
            return math.inf
        # Addition of zero avoids returning -0.0 for p = 0
        return -self._mean * math.log1p(-p) + 0.0

    def inverse_survival_probability(self, p: float) -> float:
        check_probability(p)
        if p == 0:
            return math.inf
        return -self._mean * math.log(p) + 0.0

    @property
    def mean(self) -> float:
        return self._mean

    @property
    def variance(self) -> float:
        return self._mean * self._mean

    @property
    def support_lower_bound(self) -> float:
        return 0.0

    @property
    def support_upper_bound(self) -> float:
        return math.inf

    @property
    def _median(self) -> float:
        return self._mean * LN_TWO

    def create_sampler(self, rng: np.random.Generator) -> Sampler[float]:
        mean = self._mean
        return CallableSampler(lambda: float(rng.exponential(mean)))


def configure_exponential_family() -> None:
    """
    Configure and register the Exponential distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.EXPONENTIAL):
        return

    Exponential = ParametricFamily(
        name=FamilyName.EXPONENTIAL,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["mean", "rate"],
        distribution_class=ExponentialDistribution,
    )
    Exponential.__doc__ = ExponentialDistribution.__doc__

    @parametrization(family=Exponential, name="mean")
    class _Mean(Parametrization):
        """
        Mean (scale) parametrization.

        Parameters
        ----------
        mean : float
            Mean of the distribution
        """

        mean: float

        @constraint(description="mean > 0")
        def check_mean_positive(self) -> bool:
            return self.mean > 0

    @parametrization(family=Exponential, name="rate")
    class _Rate(Parametrization):
        """
        Rate parametrization.

        Parameters
        ----------
        rate : float
            Rate (inverse mean) of the distribution
        """

        rate: float

        @constraint(description="rate > 0")
        def check_rate_positive(self) -> bool:
            return self.rate > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            return _Mean(mean=1 / self.rate)

    ParametricFamilyRegister.register(Exponential)
