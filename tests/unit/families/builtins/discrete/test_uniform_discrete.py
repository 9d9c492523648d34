"""
Tests for discrete Uniform Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest
from scipy.stats import randint

from pysatl_precise.distributions.support import IntegerIntervalSupport
from pysatl_precise.exceptions import InvalidParameterError
from pysatl_precise.families.builtins import UniformDiscreteDistribution
from pysatl_precise.families.configuration import configure_families_register
from pysatl_precise.numerics.constants import INT_MAX, INT_MIN
from pysatl_precise.types import CharacteristicName, FamilyName, UnivariateDiscrete

from ..base import BaseDistributionTest


class TestUniformDiscreteFamily(BaseDistributionTest):
    """Test suite for discrete Uniform distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        registry = configure_families_register()
        self.uniform_family = registry.get(FamilyName.DISCRETE_UNIFORM)
        self.die = self.uniform_family(lower=1, upper=6)

    def test_family_properties(self):
        """Test basic properties of discrete uniform family."""
        assert self.uniform_family.name == FamilyName.DISCRETE_UNIFORM
        assert self.uniform_family.distribution_type == UnivariateDiscrete
        assert self.uniform_family.parametrization_names == ["standard"]
        assert self.die == UniformDiscreteDistribution.of(1, 6)
        assert repr(self.die) == "UniformDiscreteDistribution(lower=1, upper=6)"

    def test_bounds_constraint(self):
        """Test that inverted bounds are rejected."""
        with pytest.raises(InvalidParameterError, match="lower <= upper"):
            UniformDiscreteDistribution.of(3, 2)

    @pytest.mark.parametrize("lower, upper", [(1.5, 3), (1, 6.0), (True, 6), (1.0, 6.0)])
    def test_non_integer_bounds_rejected(self, lower, upper):
        """Test that bounds must be integers."""
        with pytest.raises(InvalidParameterError, match="integers"):
            UniformDiscreteDistribution.of(lower, upper)

    @pytest.mark.parametrize("lower, upper", [(0, 2**40), (INT_MIN - 1, 0), (0, INT_MAX + 1)])
    def test_bounds_outside_int32_rejected(self, lower, upper):
        """Test that bounds must fit the 32-bit signed range."""
        with pytest.raises(InvalidParameterError, match="INT_MAX"):
            UniformDiscreteDistribution.of(lower, upper)

    def test_numpy_integer_bounds_accepted(self):
        """Test that numpy integers are valid bounds."""
        dist = UniformDiscreteDistribution.of(np.int64(1), np.int32(6))

        assert dist.inverse_cumulative_probability(0.5) == 3
        assert dist.support.last() == 6

    def test_moments(self):
        """Test moment calculations."""
        assert self.die.probability(3) == 1.0 / 6.0
        assert self.die.query_method(CharacteristicName.MEAN)(None) == 3.5
        assert abs(self.die.variance - 35.0 / 12.0) < self.CALCULATION_PRECISION

    @pytest.mark.parametrize(
        "char_name, scipy_func",
        [
            (CharacteristicName.PMF, randint.pmf),
            (CharacteristicName.CDF, randint.cdf),
            (CharacteristicName.SF, randint.sf),
        ],
    )
    def test_characteristics_match_scipy(self, char_name, scipy_func):
        """Test characteristics against scipy.stats.randint."""
        points = np.arange(-1, 9)
        method = self.die.query_method(char_name)
        result = np.array([method(int(k)) for k in points])

        self.assert_arrays_almost_equal(result, scipy_func(points, 1, 7))

    def test_log_probability(self):
        """Test the default log of the point mass."""
        assert self.die.log_probability(2) == pytest.approx(-np.log(6.0))
        assert self.die.log_probability(0) == -np.inf

    def test_survival_probability_is_direct(self):
        """Test that the survival function counts the points above x."""
        dist = UniformDiscreteDistribution.of(0, 10**9)

        assert dist.survival_probability(10**9 - 1) == 1.0 / (10**9 + 1)
        assert dist.survival_probability(10**9) == 0.0
        assert dist.survival_probability(-1) == 1.0

    @pytest.mark.parametrize(
        "p, expected", [(0.0, 1), (0.1, 1), (0.5, 3), (0.51, 4), (5.0 / 6.0, 5), (1.0, 6)]
    )
    def test_inverse_cumulative_probability(self, p, expected):
        """Test the smallest point whose CDF reaches p."""
        assert self.die.inverse_cumulative_probability(p) == expected

    @pytest.mark.parametrize("p, expected", [(1.0, 1), (0.5, 3), (0.49, 4), (0.0, 6)])
    def test_inverse_survival_probability(self, p, expected):
        """Test the smallest point whose survival function drops to p."""
        assert self.die.inverse_survival_probability(p) == expected

    @pytest.mark.parametrize(
        "x0, x1, expected", [(2, 4, 2.0 / 6.0), (3, 6, 0.5), (-10, 10, 1.0), (4, 5, 1.0 / 6.0)]
    )
    def test_range_probability(self, x0, x1, expected):
        """Test range probabilities on both sides of the median."""
        assert self.die.probability(x0, x1) == pytest.approx(expected)

    def test_single_point(self):
        """Test a distribution with equal bounds."""
        dist = UniformDiscreteDistribution.of(4, 4)

        assert dist.probability(4) == 1.0
        assert dist.variance == 0.0
        assert dist.inverse_cumulative_probability(0.3) == 4
        assert list(dist.support.iter_points()) == [4]

    def test_full_integer_range(self):
        """Test moments on the widest representable range."""
        dist = UniformDiscreteDistribution.of(INT_MIN, INT_MAX)

        assert dist.mean == -0.5
        assert dist.point_probability(0) == 2.0**-32
        assert dist.cumulative_probability(-1) == 0.5

    def test_sampling(self):
        """Test that draws stay inside the bounds and cover every point."""
        sample = self.die.sample(600, rng=np.random.default_rng(6))
        arr = sample.array

        assert sample.shape == (600, 1)
        assert set(np.unique(arr).tolist()) == {1.0, 2.0, 3.0, 4.0, 5.0, 6.0}

    def test_support(self):
        """Test the support of the distribution."""
        support = self.die.support

        assert support == IntegerIntervalSupport(1, 6)
        assert list(support.iter_points()) == [1, 2, 3, 4, 5, 6]
        assert 0 not in support
        assert 2.5 not in support
