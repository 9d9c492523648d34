"""
Continuous uniform distribution family implementation.

Contains the ContinuousUniform family with the ``standard`` and
``meanWidth`` parametrizations.
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
from pysatl_precise.types import FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from typing import Any

    import numpy as np

    from pysatl_precise.distributions.sampling import Sampler


class UniformContinuousDistribution(ParametricFamilyDistribution, AbstractContinuousDistribution):
    """
    Continuous uniform distribution on ``[lower, upper]``.

    The density is ``1/(upper - lower)`` on the closed interval, bounds
    included, and 0 elsewhere.

    Parameters
    ----------
    lower : float
        Lower bound.
    upper : float
        Upper bound, ``upper > lower`` with a finite width.
    """

    family_name = FamilyName.CONTINUOUS_UNIFORM

    def __init__(self, lower: float, upper: float) -> None:
        self._lower = lower
        self._upper = upper
        self._width = upper - lower
        self._pdf = 1.0 / self._width
        self._log_pdf = -math.log(self._width)

    @classmethod
    def of(cls, lower: float, upper: float) -> UniformContinuousDistribution:
        """
        Create a continuous uniform distribution.

        Raises
        ------
        InvalidParameterError
            If ``lower >= upper`` or the width overflows.
        """
        configure_uniform_family()
        return cls._from_family(lower=lower, upper=upper)

    @property
    def parameters(self) -> dict[str, Any]:
        return {"lower": self._lower, "upper": self._upper}

    def density(self, x: float) -> float:
        if x < self._lower or x > self._upper:
            return 0.0
        return self._pdf

    def log_density(self, x: float) -> float:
        if x < self._lower or x > self._upper:
            return -math.inf
        return self._log_pdf

    def probability(self, x0: float, x1: float) -> float:
        check_range(x0, x1)
        if x0 >= self._upper or x1 <= self._lower:
            return 0.0
        # Overlap of (x0, x1] with the support
        return (min(self._upper, x1) - max(self._lower, x0)) / self._width

    def cumulative_probability(self, x: float) -> float:
        if x <= self._lower:
            return 0.0
        if x >= self._upper:
            return 1.0
        return (x - self._lower) / self._width

    def survival_probability(self, x: float) -> float:
        if x <= self._lower:
            return 1.0
        if x >= self._upper:
            return 0.0
        return (self._upper - x) / self._width

    def inverse_cumulative_probability(self, p: float) -> float:
        check_probability(p)
        if p == 1:
            return self._upper
        return p * self._width + self._lower

    def inverse_survival_probability(self, p: float) -> float:
        check_probability(p)
        if p == 1:
            return self._lower
        return self._upper - p * self._width

    @property
    def mean(self) -> float:
        return 0.5 * self._lower + 0.5 * self._upper

    @property
    def variance(self) -> float:
        return self._width * self._width / 12.0

    @property
    def support_lower_bound(self) -> float:
        return self._lower

    @property
    def support_upper_bound(self) -> float:
        return self._upper

    @property
    def _median(self) -> float:
        return self.mean

    def create_sampler(self, rng: np.random.Generator) -> Sampler[float]:
        lower, upper = self._lower, self._upper
        return CallableSampler(lambda: float(rng.uniform(lower, upper)))


def configure_uniform_family() -> None:
    """
    Configure and register the continuous Uniform distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.CONTINUOUS_UNIFORM):
        return

    Uniform = ParametricFamily(
        name=FamilyName.CONTINUOUS_UNIFORM,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard", "meanWidth"],
        distribution_class=UniformContinuousDistribution,
    )
    Uniform.__doc__ = UniformContinuousDistribution.__doc__

    @parametrization(family=Uniform, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of uniform distribution.

        Parameters
        ----------
        lower : float
            Lower bound of the distribution
        upper : float
            Upper bound of the distribution
        """

        lower: float
        upper: float

        @constraint(description="lower < upper")
        def check_lower_less_than_upper(self) -> bool:
            return self.lower < self.upper

        @constraint(description="upper - lower is finite")
        def check_width_finite(self) -> bool:
            return math.isfinite(self.upper - self.lower)

    @parametrization(family=Uniform, name="meanWidth")
    class _MeanWidth(Parametrization):
        """
        Mean-width parametrization of uniform distribution.

        Parameters
        ----------
        mean : float
            Midpoint of the interval
        width : float
            Length of the interval
        """

        mean: float
        width: float

        @constraint(description="width > 0")
        def check_width_positive(self) -> bool:
            return self.width > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            half_width = 0.5 * self.width
            return _Standard(lower=self.mean - half_width, upper=self.mean + half_width)

    ParametricFamilyRegister.register(Uniform)
