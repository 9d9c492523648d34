"""
Tests for Distribution Families Configuration

This module tests the configuration and registration of the built-in
families in the global ParametricFamilyRegister.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from pysatl_precise.families.builtins import (
    ConstantContinuousDistribution,
    ExponentialDistribution,
    LaplaceDistribution,
    NormalDistribution,
    PoissonDistribution,
    UniformContinuousDistribution,
    UniformDiscreteDistribution,
    configure_normal_family,
)
from pysatl_precise.families.configuration import (
    configure_families_register,
    reset_families_register,
)
from pysatl_precise.families.registry import ParametricFamilyRegister
from pysatl_precise.types import FamilyName, UnivariateContinuous, UnivariateDiscrete


class TestConfiguration:
    """Test suite for configuration functionality."""

    def setup_method(self):
        """Setup before each test method."""
        self.registry = configure_families_register()

    def test_configure_families_register_returns_registry(self):
        """Test that configure_families_register returns a ParametricFamilyRegister."""
        assert isinstance(self.registry, ParametricFamilyRegister)

    def test_configure_families_register_is_cached(self):
        """Test that configure_families_register returns the same instance."""
        assert configure_families_register() is self.registry

    def test_all_families_registered(self):
        """Test that every built-in family is registered."""
        assert set(self.registry.names()) == set(FamilyName)

    @pytest.mark.parametrize(
        "family_name, distribution_class, distribution_type",
        [
            (FamilyName.NORMAL, NormalDistribution, UnivariateContinuous),
            (FamilyName.LAPLACE, LaplaceDistribution, UnivariateContinuous),
            (FamilyName.EXPONENTIAL, ExponentialDistribution, UnivariateContinuous),
            (FamilyName.CONTINUOUS_UNIFORM, UniformContinuousDistribution, UnivariateContinuous),
            (FamilyName.CONSTANT, ConstantContinuousDistribution, UnivariateContinuous),
            (FamilyName.POISSON, PoissonDistribution, UnivariateDiscrete),
            (FamilyName.DISCRETE_UNIFORM, UniformDiscreteDistribution, UnivariateDiscrete),
        ],
    )
    def test_family_matches_distribution_class(
        self, family_name, distribution_class, distribution_type
    ):
        """Test that each family builds its distribution class."""
        family = self.registry.get(family_name)

        assert family.distribution_type == distribution_type
        assert distribution_class.family_name == family_name
        assert family.__doc__ == distribution_class.__doc__

    def test_configure_single_family_is_idempotent(self):
        """Test that configuring a registered family does nothing."""
        family = self.registry.get(FamilyName.NORMAL)
        configure_normal_family()
        assert self.registry.get(FamilyName.NORMAL) is family

    def test_reset_families_register(self):
        """Test that reset_families_register clears the cache."""
        registry1 = configure_families_register()
        reset_families_register()
        registry2 = configure_families_register()

        # They should be different instances after reset
        assert registry1 is not registry2
        assert set(registry2.names()) == set(FamilyName)
