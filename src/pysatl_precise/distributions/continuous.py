"""
Base class for continuous distributions with accuracy-aware defaults.

The inverse functions are solved numerically with Brent's method
(:func:`scipy.optimize.brentq`) on a bracket built from the one-sided
Chebyshev inequality, and the range probability is evaluated on the side of
the median where no cancellation occurs.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import sys
from abc import ABC
from functools import cached_property
from typing import TYPE_CHECKING

from scipy.optimize import brentq

from pysatl_precise.distributions.distribution import ContinuousDistribution
from pysatl_precise.distributions.sampling import InverseTransformSampler
from pysatl_precise.exceptions import check_probability, check_range

if TYPE_CHECKING:
    from collections.abc import Callable

    import numpy as np

    from pysatl_precise.distributions.sampling import Sampler

SOLVER_RELATIVE_ACCURACY = 1e-14
SOLVER_ABSOLUTE_ACCURACY = 1e-9
SOLVER_MAX_ITERATIONS = 500

_MAX_VALUE = sys.float_info.max


class AbstractContinuousDistribution(ContinuousDistribution, ABC):
    """
    Continuous distribution with numerical inverses.

    Subclasses provide the density, the CDF, the moments and the support
    bounds. They should override :attr:`_median` when the median has a closed
    form, and :attr:`_is_support_connected` when the CDF has flat regions
    inside the support.
    """

    @cached_property
    def _median(self) -> float:
        """Median, used to split the range probability."""
        return self.inverse_cumulative_probability(0.5)

    @property
    def _is_support_connected(self) -> bool:
        return True

    def probability(self, x0: float, x1: float) -> float:
        """
        P(x0 < X <= x1).

        Above the median the difference of survival probabilities is used.

        Raises
        ------
        InvalidRangeError
            If ``x0 > x1``.
        """
        check_range(x0, x1)
        if self._median < x0:
            return self.survival_probability(x0) - self.survival_probability(x1)
        return self.cumulative_probability(x1) - self.cumulative_probability(x0)

    def inverse_cumulative_probability(self, p: float) -> float:
        """
        Smallest ``x`` with ``cumulative_probability(x) >= p``.

        Raises
        ------
        InvalidProbabilityError
            If ``p`` is not in ``[0, 1]``.
        """
        check_probability(p)
        return self._inverse_probability(p, 1 - p, complement=False)

    def inverse_survival_probability(self, p: float) -> float:
        """
        Smallest ``x`` with ``survival_probability(x) <= p``.

        Raises
        ------
        InvalidProbabilityError
            If ``p`` is not in ``[0, 1]``.
        """
        check_probability(p)
        return self._inverse_probability(1 - p, p, complement=True)

    def create_sampler(self, rng: np.random.Generator) -> Sampler[float]:
        return InverseTransformSampler(self.inverse_cumulative_probability, rng)

    def _inverse_probability(self, p: float, q: float, complement: bool) -> float:
        """
        Solve ``cdf(x) = p`` (or ``sf(x) = q`` when ``complement``).

        ``p + q == 1`` up to rounding; both are passed so the tail that is
        accurately represented drives the computation.
        """
        lower = self.support_lower_bound
        if p == 0:
            return lower
        upper = self.support_upper_bound
        if q == 0:
            return upper

        mu = self.mean
        sig = math.sqrt(self.variance)
        chebyshev_applies = math.isfinite(mu) and math.isfinite(sig) and sig != 0.0

        if lower == -math.inf:
            lower = self._finite_lower_bound(p, q, complement, upper, mu, sig, chebyshev_applies)
        if upper == math.inf:
            upper = self._finite_upper_bound(p, q, complement, lower, mu, sig, chebyshev_applies)

        fun: Callable[[float], float]
        if complement:
            fun = lambda x: q - self.survival_probability(x)  # noqa: E731
        else:
            fun = lambda x: self.cumulative_probability(x) - p  # noqa: E731

        # The bracket was clamped to the finite range and still misses the root
        if fun(lower) > 0:
            return self.support_lower_bound
        if fun(upper) < 0:
            return self.support_upper_bound

        x = brentq(
            fun,
            lower,
            upper,
            xtol=SOLVER_ABSOLUTE_ACCURACY,
            rtol=SOLVER_RELATIVE_ACCURACY,
            maxiter=SOLVER_MAX_ITERATIONS,
        )
        x = float(x)
        if not self._is_support_connected:
            x = self._search_plateau(complement, lower, x)
        return x

    def _finite_lower_bound(
        self,
        p: float,
        q: float,
        complement: bool,
        upper: float,
        mu: float,
        sig: float,
        chebyshev_applies: bool,
    ) -> float:
        # P(X <= mu - k * sig) <= 1 / (1 + k^2) = p with k = sqrt(q / p)
        lower = mu - sig * math.sqrt(q / p) if chebyshev_applies else -math.inf
        if lower == -math.inf:
            lower = min(-1.0, upper)
            if complement:
                while self.survival_probability(lower) < q:
                    lower *= 2
            else:
                while self.cumulative_probability(lower) >= p:
                    lower *= 2
            lower = max(lower, -_MAX_VALUE)
        return lower

    def _finite_upper_bound(
        self,
        p: float,
        q: float,
        complement: bool,
        lower: float,
        mu: float,
        sig: float,
        chebyshev_applies: bool,
    ) -> float:
        # P(X >= mu + k * sig) <= 1 / (1 + k^2) = q with k = sqrt(p / q)
        upper = mu + sig * math.sqrt(p / q) if chebyshev_applies else math.inf
        if upper == math.inf:
            upper = max(1.0, lower)
            if complement:
                while self.survival_probability(upper) >= q:
                    upper *= 2
            else:
                while self.cumulative_probability(upper) < p:
                    upper *= 2
            upper = min(upper, _MAX_VALUE)
        return upper

    def _search_plateau(self, complement: bool, lower: float, x: float) -> float:
        """Move ``x`` to the left end of a flat region of the CDF (or SF)."""
        dx = SOLVER_ABSOLUTE_ACCURACY
        if x - dx < lower:
            return x
        fun = self.survival_probability if complement else self.cumulative_probability
        px = fun(x)
        if fun(x - dx) != px:
            return x

        # Expand to the left until the value changes
        upper_x = x
        lower_x = x - dx
        step = dx
        while lower_x > lower and fun(lower_x) == px:
            upper_x = lower_x
            step *= 2
            lower_x = max(x - step, lower)
        if fun(lower_x) == px:
            return lower_x

        # Bisect: fun(lower_x) != px and fun(upper_x) == px
        while True:
            mid = 0.5 * (lower_x + upper_x)
            if mid in (lower_x, upper_x):
                return upper_x
            if fun(mid) == px:
                upper_x = mid
            else:
                lower_x = mid


__all__ = [
    "AbstractContinuousDistribution",
    "SOLVER_RELATIVE_ACCURACY",
    "SOLVER_ABSOLUTE_ACCURACY",
]
