"""
Base class for discrete distributions with accuracy-aware defaults.

Inverses are found by bisection over the integers after the search bracket
has been narrowed with the one-sided Chebyshev inequality.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from abc import ABC
from functools import cached_property
from typing import TYPE_CHECKING

from pysatl_precise.distributions.distribution import DiscreteDistribution
from pysatl_precise.distributions.sampling import InverseTransformSampler
from pysatl_precise.exceptions import check_probability, check_range
from pysatl_precise.numerics.constants import INT_MIN

if TYPE_CHECKING:
    from collections.abc import Callable

    import numpy as np

    from pysatl_precise.distributions.sampling import Sampler


def _checked(value: float) -> float:
    if math.isnan(value):
        raise RuntimeError("Internal error: probability evaluated to NaN")
    return value


class AbstractDiscreteDistribution(DiscreteDistribution, ABC):
    """
    Discrete distribution with bisection inverses.

    Subclasses provide the point mass, the CDF, the moments and the support
    bounds. The unbounded integer range is ``[INT_MIN, INT_MAX]``.
    """

    @cached_property
    def _median(self) -> int:
        return self.inverse_cumulative_probability(0.5)

    def _range_probability(self, x0: int, x1: int) -> float:
        check_range(x0, x1)
        if x0 + 1 >= x1:
            return 0.0 if x0 == x1 else self.point_probability(x1)
        if self._median <= x0:
            return self.survival_probability(x0) - self.survival_probability(x1)
        return self.cumulative_probability(x1) - self.cumulative_probability(x0)

    def inverse_cumulative_probability(self, p: float) -> int:
        """
        Smallest ``x`` with ``cumulative_probability(x) >= p``.

        Raises
        ------
        InvalidProbabilityError
            If ``p`` is not in ``[0, 1]``.
        RuntimeError
            If the CDF evaluates to NaN during the search.
        """
        check_probability(p)
        return self._inverse_probability(p, 1 - p, complement=False)

    def inverse_survival_probability(self, p: float) -> int:
        """
        Smallest ``x`` with ``survival_probability(x) <= p``.

        Raises
        ------
        InvalidProbabilityError
            If ``p`` is not in ``[0, 1]``.
        RuntimeError
            If the survival function evaluates to NaN during the search.
        """
        check_probability(p)
        return self._inverse_probability(1 - p, p, complement=True)

    def create_sampler(self, rng: np.random.Generator) -> Sampler[int]:
        return InverseTransformSampler(self.inverse_cumulative_probability, rng)

    def _inverse_probability(self, p: float, q: float, complement: bool) -> int:
        lower = self.support_lower_bound
        if p == 0:
            return lower
        upper = self.support_upper_bound
        if q == 0:
            return upper

        # fun(x) >= 0 iff x is an upper bound of the result
        fun: Callable[[int], bool]
        if complement:
            fun = lambda x: q >= _checked(self.survival_probability(x))  # noqa: E731
        else:
            fun = lambda x: _checked(self.cumulative_probability(x)) >= p  # noqa: E731

        if lower == INT_MIN:
            if fun(lower):
                return lower
        else:
            # cdf(lower) < p from here on
            lower -= 1

        mu = self.mean
        sigma = math.sqrt(self.variance)
        if math.isfinite(mu) and math.isfinite(sigma) and sigma != 0.0:
            tmp = mu - sigma * math.sqrt(q / p)
            if tmp > lower:
                lower = math.ceil(tmp) - 1
            tmp = mu + sigma * math.sqrt(p / q)
            if tmp < upper:
                upper = math.ceil(tmp) - 1

        return self._bisect(fun, lower, upper)

    @staticmethod
    def _bisect(fun: Callable[[int], bool], lower: int, upper: int) -> int:
        """Smallest ``x`` in ``(lower, upper]`` with ``fun(x)``; ``fun(upper)`` is assumed."""
        while lower + 1 < upper:
            middle = (lower + upper) // 2
            if fun(middle):
                upper = middle
            else:
                lower = middle
        return upper


__all__ = [
    "AbstractDiscreteDistribution",
]
