"""
Distribution Contract
=====================

Protocols shared by every univariate distribution:

- :class:`ContinuousDistribution`: outcomes are ``float``.
- :class:`DiscreteDistribution`: outcomes are ``int``.

Concrete classes implement the abstract members and inherit the default
ones. A default is a composition of the abstract members and may lose
accuracy: ``survival_probability`` is ``1 - cumulative_probability`` and
cancels when the CDF is close to 1, the range probability is a difference
of two CDF values. Distributions override the defaults wherever a direct
formula exists.

Notes
-----
- Every member is a pure function of the parameters and its arguments.
- Numeric edge cases (overflow, underflow, NaN arguments) never raise; only
  contract violations do, see :mod:`pysatl_precise.exceptions`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import abstractmethod
from typing import TYPE_CHECKING, Protocol, TypeVar, overload, runtime_checkable

import numpy as np

from pysatl_precise.distributions.sampling import ArraySample
from pysatl_precise.distributions.support import ContinuousSupport, IntegerIntervalSupport
from pysatl_precise.exceptions import check_probability, check_range
from pysatl_precise.types import CharacteristicName, UnivariateContinuous, UnivariateDiscrete

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

    from pysatl_precise.distributions.sampling import Sample, Sampler
    from pysatl_precise.distributions.support import Support
    from pysatl_precise.types import DistributionType

    from typing import TypeAlias

    Method: TypeAlias = Callable[..., Any]

T = TypeVar("T")


def _log(value: float) -> float:
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.log(value))


@runtime_checkable
class Distribution(Protocol[T]):
    """Members common to continuous and discrete distributions."""

    @property
    def distribution_type(self) -> DistributionType: ...

    @property
    @abstractmethod
    def mean(self) -> float:
        """Mean; may be NaN or infinite where undefined."""

    @property
    @abstractmethod
    def variance(self) -> float:
        """Variance; may be NaN or infinite where undefined."""

    @property
    @abstractmethod
    def support_lower_bound(self) -> T: ...

    @property
    @abstractmethod
    def support_upper_bound(self) -> T: ...

    @property
    def support(self) -> Support: ...

    @abstractmethod
    def cumulative_probability(self, x: T) -> float:
        """P(X <= x)."""

    def survival_probability(self, x: T) -> float:
        """P(X > x), computed as ``1 - cumulative_probability(x)``."""
        return 1.0 - self.cumulative_probability(x)

    @abstractmethod
    def inverse_cumulative_probability(self, p: float) -> T:
        """Smallest ``x`` with ``cumulative_probability(x) >= p``."""

    def inverse_survival_probability(self, p: float) -> T:
        """
        Smallest ``x`` with ``survival_probability(x) <= p``.

        Raises
        ------
        InvalidProbabilityError
            If ``p`` is not in ``[0, 1]``.
        """
        check_probability(p)
        return self.inverse_cumulative_probability(1 - p)

    @abstractmethod
    def create_sampler(self, rng: np.random.Generator) -> Sampler[T]:
        """Bind a sampler to ``rng``."""

    def _characteristics(self) -> dict[CharacteristicName, Method]: ...

    def query_method(self, characteristic_name: CharacteristicName) -> Method:
        """
        Look up the method computing a characteristic.

        Parameters
        ----------
        characteristic_name : CharacteristicName
            Characteristic to compute.

        Returns
        -------
        Callable
            Bound method taking one argument. Moments ignore it.

        Raises
        ------
        ValueError
            If the characteristic is not defined for this kind of distribution.
        """
        methods = self._characteristics()
        if characteristic_name not in methods:
            raise ValueError(
                f"Characteristic {characteristic_name} is not defined for "
                f"{type(self).__name__}"
            )
        return methods[characteristic_name]

    def calculate_characteristic(self, characteristic_name: CharacteristicName, value: Any) -> Any:
        return self.query_method(characteristic_name)(value)

    def sample(self, n: int, rng: np.random.Generator | None = None) -> Sample:
        """
        Draw ``n`` variates as an array of shape ``(n, 1)``.

        Parameters
        ----------
        n : int
            Number of variates.
        rng : numpy.random.Generator, optional
            Random source; a fresh ``numpy.random.default_rng()`` by default.
        """
        if rng is None:
            rng = np.random.default_rng()
        return ArraySample.from_sampler(self.create_sampler(rng), n)


@runtime_checkable
class ContinuousDistribution(Distribution[float], Protocol):
    """Univariate distribution over the reals."""

    @property
    def distribution_type(self) -> DistributionType:
        return UnivariateContinuous

    @property
    def support(self) -> Support:
        return ContinuousSupport(self.support_lower_bound, self.support_upper_bound)

    @abstractmethod
    def density(self, x: float) -> float:
        """Probability density at ``x``."""

    def log_density(self, x: float) -> float:
        """
        Natural logarithm of the density.

        ``-inf`` where the density is zero. The default is ``log(density(x))``
        and becomes ``-inf`` once the density underflows.
        """
        return _log(self.density(x))

    def probability(self, x0: float, x1: float) -> float:
        """
        P(x0 < X <= x1).

        Raises
        ------
        InvalidRangeError
            If ``x0 > x1``.
        """
        check_range(x0, x1)
        return self.cumulative_probability(x1) - self.cumulative_probability(x0)

    def _characteristics(self) -> dict[CharacteristicName, Method]:
        return {
            CharacteristicName.PDF: self.density,
            CharacteristicName.LOGPDF: self.log_density,
            CharacteristicName.CDF: self.cumulative_probability,
            CharacteristicName.SF: self.survival_probability,
            CharacteristicName.PPF: self.inverse_cumulative_probability,
            CharacteristicName.ISF: self.inverse_survival_probability,
            CharacteristicName.MEAN: lambda _=None: self.mean,
            CharacteristicName.VAR: lambda _=None: self.variance,
        }


@runtime_checkable
class DiscreteDistribution(Distribution[int], Protocol):
    """
    Univariate distribution over the integers.

    ``probability`` serves both the point mass (one argument) and the range
    mass ``P(x0 < X <= x1)`` (two arguments). Implementations provide the point
    mass as :meth:`point_probability`.
    """

    @property
    def distribution_type(self) -> DistributionType:
        return UnivariateDiscrete

    @property
    def support(self) -> Support:
        return IntegerIntervalSupport(self.support_lower_bound, self.support_upper_bound)

    @abstractmethod
    def point_probability(self, x: int) -> float:
        """P(X = x)."""

    def log_probability(self, x: int) -> float:
        """Natural logarithm of the point mass, ``-inf`` where it is zero."""
        return _log(self.point_probability(x))

    @overload
    def probability(self, x0: int) -> float: ...
    @overload
    def probability(self, x0: int, x1: int) -> float: ...

    def probability(self, x0: int, x1: int | None = None) -> float:
        """
        P(X = x0) or, given ``x1``, P(x0 < X <= x1).

        Raises
        ------
        InvalidRangeError
            If ``x0 > x1``.
        """
        if x1 is None:
            return self.point_probability(x0)
        return self._range_probability(x0, x1)

    def _range_probability(self, x0: int, x1: int) -> float:
        check_range(x0, x1)
        return self.cumulative_probability(x1) - self.cumulative_probability(x0)

    def _characteristics(self) -> dict[CharacteristicName, Method]:
        return {
            CharacteristicName.PMF: self.point_probability,
            CharacteristicName.LOGPMF: self.log_probability,
            CharacteristicName.CDF: self.cumulative_probability,
            CharacteristicName.SF: self.survival_probability,
            CharacteristicName.PPF: self.inverse_cumulative_probability,
            CharacteristicName.ISF: self.inverse_survival_probability,
            CharacteristicName.MEAN: lambda _=None: self.mean,
            CharacteristicName.VAR: lambda _=None: self.variance,
        }


__all__ = [
    "Distribution",
    "ContinuousDistribution",
    "DiscreteDistribution",
]
