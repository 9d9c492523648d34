"""
Built-in continuous distribution families.

This module contains implementations of continuous parametric families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_precise.families.builtins.continuous.constant import (
    ConstantContinuousDistribution,
    configure_constant_family,
)
from pysatl_precise.families.builtins.continuous.exponential import (
    ExponentialDistribution,
    configure_exponential_family,
)
from pysatl_precise.families.builtins.continuous.laplace import (
    LaplaceDistribution,
    configure_laplace_family,
)
from pysatl_precise.families.builtins.continuous.normal import (
    NormalDistribution,
    configure_normal_family,
)
from pysatl_precise.families.builtins.continuous.uniform import (
    UniformContinuousDistribution,
    configure_uniform_family,
)

__all__ = [
    "ConstantContinuousDistribution",
    "ExponentialDistribution",
    "LaplaceDistribution",
    "NormalDistribution",
    "UniformContinuousDistribution",
    "configure_constant_family",
    "configure_exponential_family",
    "configure_laplace_family",
    "configure_normal_family",
    "configure_uniform_family",
]
