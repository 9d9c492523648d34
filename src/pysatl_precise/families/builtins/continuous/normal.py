"""
Normal distribution family implementation.

Contains the Normal distribution and its family with the ``meanStd`` and
``meanPrec`` parametrizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

from pysatl_precise.distributions.continuous import AbstractContinuousDistribution
from pysatl_precise.distributions.sampling import CallableSampler
from pysatl_precise.exceptions import check_probability, check_range
from pysatl_precise.families.distribution import ParametricFamilyDistribution
from pysatl_precise.families.parametric_family import ParametricFamily
from pysatl_precise.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_precise.families.registry import ParametricFamilyRegister
from pysatl_precise.numerics.constants import HALF_LOG_TWO_PI
from pysatl_precise.numerics.extended_precision import expmhxx, sqrt2xx, xsqrt2pi
from pysatl_precise.numerics.special import erf_difference, erfc, inverse_erfc
from pysatl_precise.types import FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from typing import Any

    import numpy as np

    from pysatl_precise.distributions.sampling import Sampler

# CDF is 0 or 1 (to double precision) beyond this many standard deviations
_EXTREME_DEVIATIONS = 40


class NormalDistribution(ParametricFamilyDistribution, AbstractContinuousDistribution):
    """
    Normal (Gaussian) distribution.

    Probability density function:
        f(x) = 1/(σ√(2π)) * exp(-(x-μ)²/(2σ²))

    ``σ√2`` and ``σ√(2π)`` are computed once, in extended precision, so that
    the CDF and the density do not divide twice at every evaluation.

    Parameters
    ----------
    mean : float
        Mean (μ).
    sd : float
        Standard deviation (σ), positive. Not validated here; use :meth:`of`.
    """

    family_name = FamilyName.NORMAL

    def __init__(self, mean: float, sd: float) -> None:
        self._mean = mean
        self._sd = sd
        self._sd_sqrt2 = sqrt2xx(sd)
        self._sd_sqrt2pi = xsqrt2pi(sd)
        self._log_sd_plus_half_log_2pi = math.log(sd) + HALF_LOG_TWO_PI

    @classmethod
    def of(cls, mean: float, sd: float) -> NormalDistribution:
        """
        Create a normal distribution.

        Raises
        ------
        InvalidParameterError
            If ``sd <= 0``.
        """
        configure_normal_family()
        return cls._from_family(mean=mean, sd=sd)

    @property
    def parameters(self) -> dict[str, Any]:
        return {"mean": self._mean, "sd": self._sd}

    @property
    def standard_deviation(self) -> float:
        return self._sd

    def density(self, x: float) -> float:
        z = (x - self._mean) / self._sd
        return expmhxx(z) / self._sd_sqrt2pi

    def log_density(self, x: float) -> float:
        z = (x - self._mean) / self._sd
        return -0.5 * z * z - self._log_sd_plus_half_log_2pi

    def probability(self, x0: float, x1: float) -> float:
        check_range(x0, x1)
        v0 = (x0 - self._mean) / self._sd_sqrt2
        v1 = (x1 - self._mean) / self._sd_sqrt2
        return 0.5 * erf_difference(v0, v1)

    def cumulative_probability(self, x: float) -> float:
        dev = x - self._mean
        if abs(dev) > _EXTREME_DEVIATIONS * self._sd:
            return 0.0 if dev < 0 else 1.0
        return 0.5 * erfc(-dev / self._sd_sqrt2)

    def survival_probability(self, x: float) -> float:
        dev = x - self._mean
        if abs(dev) > _EXTREME_DEVIATIONS * self._sd:
            return 1.0 if dev < 0 else 0.0
        return 0.5 * erfc(dev / self._sd_sqrt2)

    def inverse_cumulative_probability(self, p: float) -> float:
        check_probability(p)
        return self._mean - self._sd_sqrt2 * inverse_erfc(2 * p)

    def inverse_survival_probability(self, p: float) -> float:
        check_probability(p)
        return self._mean + self._sd_sqrt2 * inverse_erfc(2 * p)

    @property
    def mean(self) -> float:
        return self._mean

    @property
    def variance(self) -> float:
        return self._sd * self._sd

    @property
    def support_lower_bound(self) -> float:
        return -math.inf

    @property
    def support_upper_bound(self) -> float:
        return math.inf

    @property
    def _median(self) -> float:
        return self._mean

    def create_sampler(self, rng: np.random.Generator) -> Sampler[float]:
        mean, sd = self._mean, self._sd
        return CallableSampler(lambda: float(rng.normal(mean, sd)))


def configure_normal_family() -> None:
    """
    Configure and register the Normal distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.NORMAL):
        return

    Normal = ParametricFamily(
        name=FamilyName.NORMAL,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["meanStd", "meanPrec"],
        distribution_class=NormalDistribution,
    )
    Normal.__doc__ = NormalDistribution.__doc__

    @parametrization(family=Normal, name="meanStd")
    class _MeanStd(Parametrization):
        """
        Standard parametrization of normal distribution.

        Parameters
        ----------
        mean : float
            Mean of the distribution
        sd : float
            Standard deviation of the distribution
        """

        mean: float
        sd: float

        @constraint(description="sd > 0")
        def check_sd_positive(self) -> bool:
            return self.sd > 0

    @parametrization(family=Normal, name="meanPrec")
    class _MeanPrec(Parametrization):
        """
        Mean-precision parametrization of normal distribution.

        Parameters
        ----------
        mean : float
            Mean of the distribution
        tau : float
            Precision (inverse variance)
        """

        mean: float
        tau: float

        @constraint(description="tau > 0")
        def check_tau_positive(self) -> bool:
            return self.tau > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            return _MeanStd(mean=self.mean, sd=1 / math.sqrt(self.tau))

    ParametricFamilyRegister.register(Normal)
