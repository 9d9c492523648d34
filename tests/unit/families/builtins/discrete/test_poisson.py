"""
Tests for Poisson Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import warnings

import numpy as np
import pytest
from scipy.stats import poisson

from pysatl_precise.distributions.support import IntegerIntervalSupport
from pysatl_precise.exceptions import InvalidParameterError, InvalidRangeError
from pysatl_precise.families.builtins import PoissonDistribution
from pysatl_precise.families.builtins.discrete.poisson import MAX_MEAN
from pysatl_precise.families.configuration import configure_families_register
from pysatl_precise.numerics.constants import INT_MAX
from pysatl_precise.types import CharacteristicName, FamilyName, UnivariateDiscrete

from ..base import BaseDistributionTest


class TestPoissonFamily(BaseDistributionTest):
    """Test suite for Poisson distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        registry = configure_families_register()
        self.poisson_family = registry.get(FamilyName.POISSON)
        self.poisson_dist_example = self.poisson_family(mean=4.0)

    def test_family_properties(self):
        """Test basic properties of Poisson family."""
        assert self.poisson_family.name == FamilyName.POISSON
        assert self.poisson_family.distribution_type == UnivariateDiscrete
        assert self.poisson_family.parametrization_names == ["mean"]
        assert self.poisson_dist_example.parameters == {"mean": 4.0}

    @pytest.mark.parametrize("mean", [0.0, -1.0, math.nan])
    def test_mean_constraint(self, mean):
        """Test that the mean must be positive."""
        with pytest.raises(InvalidParameterError, match="mean > 0"):
            PoissonDistribution.of(mean)

    def test_moments(self):
        """Test moment calculations."""
        dist = self.poisson_dist_example

        assert dist.query_method(CharacteristicName.MEAN)(None) == 4.0
        assert dist.query_method(CharacteristicName.VAR)(None) == 4.0

    def test_probability_of_zero(self):
        """Test the mass at zero."""
        dist = self.poisson_dist_example

        assert dist.probability(0) == math.exp(-4.0)
        assert dist.cumulative_probability(0) == math.exp(-4.0)
        assert dist.log_probability(0) == -4.0
        assert dist.survival_probability(0) == pytest.approx(1.0 - math.exp(-4.0), rel=1e-15)

    def test_point_probability_matches_scipy(self):
        """Test the saddle-point mass against scipy.stats.poisson."""
        self.assert_matches_reference(
            self.poisson_dist_example.point_probability,
            lambda k: poisson.pmf(k, 4.0),
            [1, 2, 3, 4, 5, 10, 15, 16, 30, 60],
            rtol=1e-11,
        )
        self.assert_matches_reference(
            self.poisson_dist_example.log_probability,
            lambda k: poisson.logpmf(k, 4.0),
            [1, 4, 16, 100, 1000],
            rtol=1e-11,
        )

    def test_point_probability_for_large_mean(self):
        """Test the mass near the mean of a large-mean distribution."""
        dist = PoissonDistribution.of(1e6)

        for k in (999_000, 1_000_000, 1_002_500):
            assert dist.point_probability(k) == pytest.approx(poisson.pmf(k, 1e6), rel=1e-7)

    def test_outside_support(self):
        """Test negative arguments."""
        dist = self.poisson_dist_example

        assert dist.point_probability(-1) == 0.0
        assert dist.log_probability(-1) == -math.inf
        assert dist.cumulative_probability(-1) == 0.0
        assert dist.survival_probability(-1) == 1.0

    @pytest.mark.parametrize(
        "char_name, scipy_func",
        [
            (CharacteristicName.CDF, poisson.cdf),
            (CharacteristicName.SF, poisson.sf),
        ],
    )
    def test_distribution_functions_match_scipy(self, char_name, scipy_func):
        """Test the CDF and the survival function against scipy.stats.poisson."""
        self.assert_matches_reference(
            self.poisson_dist_example.query_method(char_name),
            lambda k: scipy_func(k, 4.0),
            [1, 2, 4, 8, 20, 40],
            rtol=1e-12,
        )

    @pytest.mark.parametrize("p", [0.0, 0.01, 0.1, 0.5, 0.9, 0.99, 0.999999])
    def test_inverse_cumulative_probability(self, p):
        """Test quantiles against scipy.stats.poisson."""
        assert self.poisson_dist_example.inverse_cumulative_probability(p) == int(
            poisson.ppf(p, 4.0)
        )

    @pytest.mark.parametrize("p", [0.999, 0.5, 0.1, 1e-6, 1e-12])
    def test_inverse_survival_probability(self, p):
        """Test the defining property of the inverse survival function."""
        dist = self.poisson_dist_example
        x = dist.inverse_survival_probability(p)

        assert dist.survival_probability(x) <= p
        assert dist.survival_probability(x - 1) > p

    def test_inverse_bounds(self):
        """Test the inverse functions at the ends of [0, 1]."""
        dist = self.poisson_dist_example

        assert dist.inverse_cumulative_probability(1.0) == INT_MAX
        assert dist.inverse_survival_probability(1.0) == 0
        assert dist.inverse_survival_probability(0.0) == INT_MAX

    @pytest.mark.parametrize("x0, x1", [(2, 6), (-5, 3), (20, 30)])
    def test_range_probability(self, x0, x1):
        """Test the range probability on both sides of the median."""
        expected = poisson.cdf(x1, 4.0) - poisson.cdf(x0, 4.0)
        if x0 >= 4:
            expected = poisson.sf(x0, 4.0) - poisson.sf(x1, 4.0)

        assert self.poisson_dist_example.probability(x0, x1) == pytest.approx(
            expected, rel=1e-12
        )

    def test_short_ranges(self):
        """Test ranges holding at most one point."""
        dist = self.poisson_dist_example

        assert dist.probability(3, 3) == 0.0
        assert dist.probability(3, 4) == dist.probability(4)
        with pytest.raises(InvalidRangeError):
            dist.probability(4, 3)

    def test_support(self):
        """Test the support of the distribution."""
        support = self.poisson_dist_example.support

        assert support == IntegerIntervalSupport(0, INT_MAX)
        assert support.first() == 0
        assert support.last() is None


class TestPoissonSampling(BaseDistributionTest):
    """Test suite for Poisson sampling."""

    def test_sampling(self):
        """Test sample shape, support and mean."""
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            sample = PoissonDistribution.of(4.0).sample(4000, rng=np.random.default_rng(4))
        arr = sample.array

        assert sample.shape == (4000, 1)
        assert (arr >= 0).all()
        assert (arr == np.floor(arr)).all()
        assert float(arr.mean()) == pytest.approx(4.0, abs=0.2)

    def test_gaussian_fallback_for_large_mean(self):
        """Test that a huge mean switches to a clipped Gaussian with a warning."""
        dist = PoissonDistribution.of(MAX_MEAN)

        with pytest.warns(UserWarning, match="Gaussian approximation"):
            sample = dist.sample(200, rng=np.random.default_rng(9))
        arr = sample.array

        assert ((arr >= 0) & (arr <= INT_MAX)).all()
        assert (arr == np.floor(arr)).all()
        assert float(arr.mean()) == pytest.approx(MAX_MEAN, rel=1e-3)
