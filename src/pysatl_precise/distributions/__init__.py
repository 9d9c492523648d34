"""
Distributions subpackage

The distribution contract and its default implementations:

- distribution protocols (:mod:`.distribution`);
- abstract bases with numerical inverses (:mod:`.continuous`, :mod:`.discrete`);
- samplers and sample containers (:mod:`.sampling`);
- support descriptors (:mod:`.support`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .continuous import AbstractContinuousDistribution
from .discrete import AbstractDiscreteDistribution
from .distribution import ContinuousDistribution, DiscreteDistribution, Distribution
from .sampling import (
    ArraySample,
    CallableSampler,
    InverseTransformSampler,
    Sample,
    Sampler,
    samples,
)
from .support import ContinuousSupport, DiscreteSupport, IntegerIntervalSupport, Support

__all__ = [
    # contract
    "Distribution",
    "ContinuousDistribution",
    "DiscreteDistribution",
    "AbstractContinuousDistribution",
    "AbstractDiscreteDistribution",
    # sampling
    "Sampler",
    "CallableSampler",
    "InverseTransformSampler",
    "samples",
    "Sample",
    "ArraySample",
    # support
    "Support",
    "ContinuousSupport",
    "DiscreteSupport",
    "IntegerIntervalSupport",
]
