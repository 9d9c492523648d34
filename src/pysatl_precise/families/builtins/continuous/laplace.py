"""
Laplace distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

from pysatl_precise.distributions.continuous import AbstractContinuousDistribution
from pysatl_precise.exceptions import check_probability
from pysatl_precise.families.distribution import ParametricFamilyDistribution
from pysatl_precise.families.parametric_family import ParametricFamily
from pysatl_precise.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_precise.families.registry import ParametricFamilyRegister
from pysatl_precise.types import FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from typing import Any


class LaplaceDistribution(ParametricFamilyDistribution, AbstractContinuousDistribution):
    """
    Laplace (double exponential) distribution.

    Probability density function:
        f(x) = 1/(2β) * exp(-|x-μ|/β)

    The density at ``x = μ``, where it is not differentiable, is ``1/(2β)``.

    Parameters
    ----------
    mu : float
        Location (μ), also the mean and the median.
    beta : float
        Scale (β), positive.
    """

    family_name = FamilyName.LAPLACE

    def __init__(self, mu: float, beta: float) -> None:
        self._mu = mu
        self._beta = beta
        self._log2beta = math.log(2.0 * beta)

    @classmethod
    def of(cls, mu: float, beta: float) -> LaplaceDistribution:
        """
        Create a Laplace distribution.

        Raises
        ------
        InvalidParameterError
            If ``beta <= 0``.
        """
        configure_laplace_family()
        return cls._from_family(mu=mu, beta=beta)

    @property
    def parameters(self) -> dict[str, Any]:
        return {"mu": self._mu, "beta": self._beta}

    @property
    def location(self) -> float:
        return self._mu

    @property
    def scale(self) -> float:
        return self._beta

    def density(self, x: float) -> float:
        return math.exp(-abs(x - self._mu) / self._beta) / (2.0 * self._beta)

    def log_density(self, x: float) -> float:
        return -abs(x - self._mu) / self._beta - self._log2beta

    def cumulative_probability(self, x: float) -> float:
        if x <= self._mu:
            return 0.5 * math.exp((x - self._mu) / self._beta)
        return 1.0 - 0.5 * math.exp((self._mu - x) / self._beta)

    def survival_probability(self, x: float) -> float:
        if x <= self._mu:
            return 1.0 - 0.5 * math.exp((x - self._mu) / self._beta)
        return 0.5 * math.exp((self._mu - x) / self._beta)

    def inverse_cumulative_probability(self, p: float) -> float:
        check_probability(p)
        if p == 0:
            return -math.inf
        if p == 1:
            return math.inf
        x = -math.log(2.0 - 2.0 * p) if p > 0.5 else math.log(2.0 * p)
        return self._mu + self._beta * x

    def inverse_survival_probability(self, p: float) -> float:
        # Mirror of the inverse CDF around mu
        check_probability(p)
        if p == 1:
            return -math.inf
        if p == 0:
            return math.inf
        x = math.log(2.0 - 2.0 * p) if p > 0.5 else -math.log(2.0 * p)
        return self._mu + self._beta * x

    @property
    def mean(self) -> float:
        return self._mu

    @property
    def variance(self) -> float:
        return 2.0 * self._beta * self._beta

    @property
    def support_lower_bound(self) -> float:
        return -math.inf

    @property
    def support_upper_bound(self) -> float:
        return math.inf

    @property
    def _median(self) -> float:
        return self._mu


def configure_laplace_family() -> None:
    """
    Configure and register the Laplace distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.LAPLACE):
        return

    Laplace = ParametricFamily(
        name=FamilyName.LAPLACE,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["locationScale"],
        distribution_class=LaplaceDistribution,
    )
    Laplace.__doc__ = LaplaceDistribution.__doc__

    @parametrization(family=Laplace, name="locationScale")
    class _LocationScale(Parametrization):
        mu: float
        beta: float

        @constraint(description="beta > 0")
        def check_beta_positive(self) -> bool:
            return self.beta > 0

    ParametricFamilyRegister.register(Laplace)
