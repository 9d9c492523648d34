"""
Poisson distribution family implementation.

The point mass is evaluated with the saddle-point expansion of Loader
(Stirling error plus deviance), which avoids factorials and large powers.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import warnings
from typing import TYPE_CHECKING

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
from pysatl_precise.numerics.constants import HALF_LOG_TWO_PI, INT_MAX
from pysatl_precise.numerics.special import (
    deviance_part,
    regularized_gamma_p,
    regularized_gamma_q,
    stirling_error,
)
from pysatl_precise.types import FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    from typing import Any

    import numpy as np

    from pysatl_precise.distributions.sampling import Sampler

MAX_MEAN = 0.5 * INT_MAX
"""Largest mean drawn with the exact Poisson sampler."""


class PoissonDistribution(ParametricFamilyDistribution, AbstractDiscreteDistribution):
    """
    Poisson distribution.

    Probability mass function:
        P(X = k) = μ^k * exp(-μ) / k!,  k = 0, 1, 2, ...

    Parameters
    ----------
    mean : float
        Mean (μ), positive.
    """

    family_name = FamilyName.POISSON

    def __init__(self, mean: float) -> None:
        self._mean = mean

    @classmethod
    def of(cls, mean: float) -> PoissonDistribution:
        """
        Create a Poisson distribution.

        Raises
        ------
        InvalidParameterError
            If ``mean <= 0``.
        """
        configure_poisson_family()
        return cls._from_family(mean=mean)

    @property
    def parameters(self) -> dict[str, Any]:
        return {"mean": self._mean}

    def point_probability(self, x: int) -> float:
        return math.exp(self.log_probability(x))

    def log_probability(self, x: int) -> float:
        if x < 0:
            return -math.inf
        if x == 0:
            return -self._mean
        return (
            -stirling_error(x)
            - deviance_part(x, self._mean)
            - HALF_LOG_TWO_PI
            - 0.5 * math.log(x)
        )

    def cumulative_probability(self, x: int) -> float:
        if x < 0:
            return 0.0
        if x == 0:
            return math.exp(-self._mean)
        return regularized_gamma_q(x + 1.0, self._mean)

    def survival_probability(self, x: int) -> float:
        if x < 0:
            return 1.0
        if x == 0:
            return -math.expm1(-self._mean)
        return regularized_gamma_p(x + 1.0, self._mean)

    @property
    def mean(self) -> float:
        return self._mean

    @property
    def variance(self) -> float:
        return self._mean

    @property
    def support_lower_bound(self) -> int:
        return 0

    @property
    def support_upper_bound(self) -> int:
        return INT_MAX

    def create_sampler(self, rng: np.random.Generator) -> Sampler[int]:
        mu = self._mean
        if mu < MAX_MEAN:
            return CallableSampler(lambda: int(rng.poisson(mu)))

        warnings.warn(
            f"Poisson mean {mu} is too large for exact sampling; "
            "using a Gaussian approximation",
            UserWarning,
            stacklevel=2,
        )
        sd = math.sqrt(mu)

        def _draw() -> int:
            # The 0.5 shift rounds the truncated variate to the nearest integer
            return min(INT_MAX, max(0, int(rng.normal(mu + 0.5, sd))))

        return CallableSampler(_draw)


def configure_poisson_family() -> None:
    """
    Configure and register the Poisson distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.POISSON):
        return

    Poisson = ParametricFamily(
        name=FamilyName.POISSON,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["mean"],
        distribution_class=PoissonDistribution,
    )
    Poisson.__doc__ = PoissonDistribution.__doc__

    @parametrization(family=Poisson, name="mean")
    class _Mean(Parametrization):
        mean: float

        @constraint(description="mean > 0")
        def check_mean_positive(self) -> bool:
            return self.mean > 0

    ParametricFamilyRegister.register(Poisson)
