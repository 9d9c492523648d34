__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import pytest

from pysatl_precise.exceptions import (
    DistributionError,
    ErrorKind,
    InvalidParameterError,
    InvalidProbabilityError,
    InvalidRangeError,
    check_probability,
    check_range,
)


class TestErrorTaxonomy:
    @pytest.mark.parametrize(
        "error, kind",
        [
            (InvalidParameterError("sd > 0", {"sd": -1.0}), ErrorKind.INVALID_PARAMETER),
            (InvalidProbabilityError(1.5), ErrorKind.INVALID_PROBABILITY),
            (InvalidRangeError(2.0, 1.0), ErrorKind.INVALID_RANGE),
        ],
    )
    def test_kind_and_hierarchy(self, error: DistributionError, kind: ErrorKind) -> None:
        assert error.kind is kind
        assert isinstance(error, DistributionError)
        assert isinstance(error, ValueError)

    def test_parameter_error_fields(self) -> None:
        values = {"mean": 0.0, "sd": -1.0}
        error = InvalidParameterError("sd > 0", values)

        assert error.constraint == "sd > 0"
        assert error.parameters == values
        assert error.parameters is not values
        assert "sd > 0" in str(error)
        assert "-1.0" in str(error)

    def test_probability_error_fields(self) -> None:
        error = InvalidProbabilityError(-0.25)

        assert error.value == -0.25
        assert (error.lower, error.upper) == (0.0, 1.0)
        assert str(error) == "Not a probability: -0.25 is out of range [0.0, 1.0]"

    def test_range_error_fields(self) -> None:
        error = InvalidRangeError(3, 1)

        assert (error.lower, error.upper) == (3, 1)
        assert str(error) == "Lower bound 3 > upper bound 1"


class TestChecks:
    @pytest.mark.parametrize("p", [0.0, 1e-300, 0.5, 1.0])
    def test_valid_probability(self, p: float) -> None:
        check_probability(p)

    @pytest.mark.parametrize("p", [-1e-300, 1.0000000000000002, math.nan, math.inf, -math.inf])
    def test_invalid_probability(self, p: float) -> None:
        with pytest.raises(InvalidProbabilityError):
            check_probability(p)

    @pytest.mark.parametrize("x0, x1", [(0.0, 1.0), (1.0, 1.0), (-math.inf, math.inf), (-5, 3)])
    def test_valid_range(self, x0: float, x1: float) -> None:
        check_range(x0, x1)

    def test_invalid_range(self) -> None:
        with pytest.raises(InvalidRangeError) as info:
            check_range(1.0, 0.0)
        assert info.value.lower == 1.0
        assert info.value.upper == 0.0

    def test_nan_range_is_not_rejected(self) -> None:
        # NaN compares false; the probability it produces is NaN instead
        check_range(math.nan, 0.0)
