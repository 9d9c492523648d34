"""
Built-in discrete distribution families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_precise.families.builtins.discrete.poisson import (
    PoissonDistribution,
    configure_poisson_family,
)
from pysatl_precise.families.builtins.discrete.uniform import (
    UniformDiscreteDistribution,
    configure_uniform_discrete_family,
)

__all__ = [
    "PoissonDistribution",
    "UniformDiscreteDistribution",
    "configure_poisson_family",
    "configure_uniform_discrete_family",
]
