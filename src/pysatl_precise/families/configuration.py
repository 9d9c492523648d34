"""
Distribution Families Configuration
====================================

Registers the built-in parametric families:

- Continuous: Normal, Laplace, Exponential, ContinuousUniform, Constant.
- Discrete: Poisson, DiscreteUniform.

Notes
-----
- All families are registered in the global ParametricFamilyRegister.
- Registration is idempotent; each ``configure_*_family`` skips a family that
  is already registered.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from pysatl_precise.families.builtins import (
    configure_constant_family,
    configure_exponential_family,
    configure_laplace_family,
    configure_normal_family,
    configure_poisson_family,
    configure_uniform_discrete_family,
    configure_uniform_family,
)
from pysatl_precise.families.registry import ParametricFamilyRegister


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Register all built-in families in the global registry.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of parametric families.
    """
    configure_normal_family()
    configure_laplace_family()
    configure_exponential_family()
    configure_uniform_family()
    configure_constant_family()
    configure_poisson_family()
    configure_uniform_discrete_family()
    return ParametricFamilyRegister()


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()
