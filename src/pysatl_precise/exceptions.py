"""
Errors raised by distributions.

Every failure is a precondition violation local to one call and is raised
immediately to the caller. The exceptions carry the offending values as
structured fields; the message is rendered from them.

- :class:`InvalidParameterError`: a factory argument violates a constraint.
- :class:`InvalidProbabilityError`: an argument to an inverse function lies
  outside ``[0, 1]``.
- :class:`InvalidRangeError`: ``probability(x0, x1)`` called with ``x0 > x1``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any, ClassVar


class ErrorKind(StrEnum):
    """Closed enumeration of validation failures."""

    INVALID_PARAMETER = "invalid_parameter"
    INVALID_PROBABILITY = "invalid_probability"
    INVALID_RANGE = "invalid_range"


class DistributionError(ValueError):
    """Base class of all distribution errors."""

    kind: ClassVar[ErrorKind]


class InvalidParameterError(DistributionError):
    """
    A distribution parameter does not satisfy a constraint.

    Parameters
    ----------
    constraint : str
        Human-readable description of the violated constraint.
    parameters : Mapping[str, Any]
        Parameter values that were rejected.
    """

    kind = ErrorKind.INVALID_PARAMETER

    def __init__(self, constraint: str, parameters: Mapping[str, Any]) -> None:
        self.constraint = constraint
        self.parameters = dict(parameters)
        super().__init__(f'Constraint "{constraint}" does not hold for {self.parameters}')


class InvalidProbabilityError(DistributionError):
    """
    A probability argument is outside ``[lower, upper]`` (or is NaN).

    Parameters
    ----------
    value : float
        The offending value.
    lower, upper : float
        The admissible interval, ``[0, 1]`` by default.
    """

    kind = ErrorKind.INVALID_PROBABILITY

    def __init__(self, value: float, lower: float = 0.0, upper: float = 1.0) -> None:
        self.value = value
        self.lower = lower
        self.upper = upper
        super().__init__(f"Not a probability: {value} is out of range [{lower}, {upper}]")


class InvalidRangeError(DistributionError):
    """
    A range ``(lower, upper]`` with ``lower > upper``.

    Parameters
    ----------
    lower : float
        Lower bound of the range.
    upper : float
        Upper bound of the range.
    """

    kind = ErrorKind.INVALID_RANGE

    def __init__(self, lower: float, upper: float) -> None:
        self.lower = lower
        self.upper = upper
        super().__init__(f"Lower bound {lower} > upper bound {upper}")


def check_probability(p: float) -> None:
    """
    Check that ``p`` is in ``[0, 1]``.

    Raises
    ------
    InvalidProbabilityError
        If ``p < 0``, ``p > 1`` or ``p`` is NaN.
    """
    if 0 <= p <= 1:
        return
    raise InvalidProbabilityError(p)


def check_range(x0: float, x1: float) -> None:
    """
    Check that ``x0 <= x1``.

    Raises
    ------
    InvalidRangeError
        If ``x0 > x1``.
    """
    if x0 > x1:
        raise InvalidRangeError(x0, x1)


__all__ = [
    "ErrorKind",
    "DistributionError",
    "InvalidParameterError",
    "InvalidProbabilityError",
    "InvalidRangeError",
    "check_probability",
    "check_range",
]
