"""
Support descriptors for univariate distributions.

- :class:`ContinuousSupport`: a closed interval of the real line.
- :class:`IntegerIntervalSupport`: the integers of ``[lower, upper]``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from math import inf
from typing import TYPE_CHECKING, Protocol, cast, overload, runtime_checkable

import numpy as np

from pysatl_precise.numerics.constants import INT_MAX, INT_MIN
from pysatl_precise.types import BoolArray, ContinuousSupportShape1D, Number, NumericArray

if TYPE_CHECKING:
    from collections.abc import Iterator


@runtime_checkable
class Support(Protocol):
    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...


@dataclass(frozen=True, slots=True)
class ContinuousSupport(Support):
    """
    Closed interval of the real line between two bounds.

    Infinite bounds are excluded, so the real line contains no infinity.

    Parameters
    ----------
    left : float, default=-inf
        Lower bound, ``support_lower_bound`` of the distribution.
    right : float, default=inf
        Upper bound, ``support_upper_bound`` of the distribution.
    """

    left: float = -inf
    right: float = inf

    def __post_init__(self) -> None:
        if self.left > self.right:
            raise ValueError(f"Empty support: {self.left} > {self.right}")

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        xf = np.asarray(x, dtype=float)
        result = np.isfinite(xf) & (xf >= self.left) & (xf <= self.right)

        if np.ndim(xf) == 0:
            return bool(result)
        return cast(BoolArray, result)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    @property
    def is_left_bounded(self) -> bool:
        return self.left > -inf

    @property
    def is_right_bounded(self) -> bool:
        return self.right < inf

    @property
    def shape(self) -> ContinuousSupportShape1D:
        if self.left == self.right:
            return ContinuousSupportShape1D.SINGLE_POINT
        if self.is_left_bounded:
            if self.is_right_bounded:
                return ContinuousSupportShape1D.BOUNDED_INTERVAL
            return ContinuousSupportShape1D.RAY_RIGHT
        if self.is_right_bounded:
            return ContinuousSupportShape1D.RAY_LEFT
        return ContinuousSupportShape1D.REAL_LINE


@runtime_checkable
class DiscreteSupport(Support, Protocol):
    def iter_points(self) -> Iterator[int]: ...

    def first(self) -> int | None: ...

    def last(self) -> int | None: ...


@dataclass(frozen=True, slots=True)
class IntegerIntervalSupport(DiscreteSupport):
    """
    Integers between two bounds, both included.

    Parameters
    ----------
    lower : int, default=INT_MIN
        Smallest point. ``INT_MIN`` marks a support unbounded on the left.
    upper : int, default=INT_MAX
        Largest point. ``INT_MAX`` marks a support unbounded on the right.
    """

    lower: int = INT_MIN
    upper: int = INT_MAX

    def __post_init__(self) -> None:
        if self.lower > self.upper:
            raise ValueError(f"Empty support: {self.lower} > {self.upper}")

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        xf = np.asarray(x, dtype=float)
        result = (xf == np.floor(xf)) & (xf >= self.lower) & (xf <= self.upper)

        if np.ndim(xf) == 0:
            return bool(result)
        return cast(BoolArray, result)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    def iter_points(self) -> Iterator[int]:
        if not self.is_left_bounded:
            raise RuntimeError("Cannot enumerate a support unbounded on the left")
        return iter(range(self.lower, self.upper + 1))

    def first(self) -> int | None:
        return self.lower if self.is_left_bounded else None

    def last(self) -> int | None:
        return self.upper if self.is_right_bounded else None

    @property
    def is_left_bounded(self) -> bool:
        return self.lower > INT_MIN

    @property
    def is_right_bounded(self) -> bool:
        return self.upper < INT_MAX

    __iter__ = iter_points


__all__ = [
    "Support",
    "ContinuousSupport",
    "DiscreteSupport",
    "IntegerIntervalSupport",
]
