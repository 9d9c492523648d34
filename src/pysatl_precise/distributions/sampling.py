"""
Sampling Interfaces
===================

Samplers draw one variate per call from a distribution bound to a
``numpy.random.Generator``. Sequences of variates are produced by
:func:`samples`, implemented once for every sampler.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from itertools import count
from typing import TYPE_CHECKING, Generic, Protocol, TypeVar, runtime_checkable

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from typing import Any

    import numpy.typing as npt

T = TypeVar("T")


@runtime_checkable
class Sampler(Protocol[T]):
    """Single-method capability producing one variate per call."""

    def sample(self) -> T: ...


class CallableSampler(Generic[T]):
    """
    Sampler backed by a zero-argument function.

    Parameters
    ----------
    draw : Callable[[], T]
        Function returning one variate. It usually closes over the parameters
        of a distribution and a random generator.
    """

    __slots__ = ("_draw",)

    def __init__(self, draw: Callable[[], T]) -> None:
        self._draw = draw

    def sample(self) -> T:
        return self._draw()


class InverseTransformSampler(Generic[T]):
    """
    Inverse transform sampling.

    A uniform deviate ``u`` in ``[0, 1)`` is mapped through the quantile
    function of the distribution.

    Parameters
    ----------
    inverse_cdf : Callable[[float], T]
        Quantile function.
    rng : numpy.random.Generator
        Source of uniform deviates.
    """

    __slots__ = ("_inverse_cdf", "_rng")

    def __init__(self, inverse_cdf: Callable[[float], T], rng: np.random.Generator) -> None:
        self._inverse_cdf = inverse_cdf
        self._rng = rng

    def sample(self) -> T:
        return self._inverse_cdf(float(self._rng.random()))


def samples(sampler: Sampler[T], size: int | None = None) -> Iterator[T]:
    """
    Lazily draw variates from ``sampler``.

    Parameters
    ----------
    sampler : Sampler[T]
        Source of variates.
    size : int, optional
        Number of variates. When omitted the iterator never ends.

    Returns
    -------
    Iterator[T]
        A fresh iterator; calling the function again restarts the sequence
        (from the current state of the sampler's random generator).

    Raises
    ------
    ValueError
        If ``size`` is negative.
    """
    if size is None:
        return (sampler.sample() for _ in count())
    if size < 0:
        raise ValueError(f"Invalid stream size: {size}")
    return (sampler.sample() for _ in range(size))


class Sample(Protocol):
    """
    Protocol for sample containers.

    Attributes
    ----------
    array : numpy.ndarray
        Array representation of the samples.
    shape : tuple[int, ...]
        Shape of the sample array.
    """

    def __len__(self) -> int: ...
    @property
    def array(self) -> npt.NDArray[np.floating[Any]]: ...
    @property
    def shape(self) -> tuple[int, ...]: ...


class ArraySample:
    """
    Batch of variates stored as an array of shape ``(n, d)``.

    Parameters
    ----------
    data : numpy.ndarray
        2D floating-point array.

    Raises
    ------
    ValueError
        If data is not 2D.
    """

    dimension: int
    data: npt.NDArray[np.floating[Any]]

    def __init__(self, data: npt.NDArray[np.floating[Any]]) -> None:
        if data.ndim != 2:
            raise ValueError(f"Expected a 2D array of shape (n, d), got {data.ndim}D")
        self.data = data
        self.dimension = int(data.shape[1])

    @classmethod
    def from_sampler(cls, sampler: Sampler[Any], n: int) -> ArraySample:
        """Collect ``n`` univariate draws into a column."""
        column = np.fromiter(samples(sampler, n), dtype=float, count=n)
        return cls(column.reshape(n, 1))

    def __len__(self) -> int:
        return int(self.data.shape[0])

    def __iter__(self) -> Iterator[npt.NDArray[np.floating[Any]]]:
        yield from self.data

    @property
    def array(self) -> npt.NDArray[np.floating[Any]]:
        return self.data

    @property
    def shape(self) -> tuple[int, ...]:
        n, d = self.data.shape
        return int(n), int(d)


__all__ = [
    "Sampler",
    "CallableSampler",
    "InverseTransformSampler",
    "samples",
    "Sample",
    "ArraySample",
]
