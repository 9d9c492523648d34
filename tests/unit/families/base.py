"""
Helpers shared by the family tests.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from pysatl_precise.families import (
    ParametricFamily,
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_precise.families.builtins import ConstantContinuousDistribution
from pysatl_precise.types import UnivariateContinuous


class TestBaseFamily:
    FAMILY_NAME = "Default"

    def make_default_family(self, name: str | None = None) -> ParametricFamily:
        """
        Family of constants with a ``base`` parametrization (``value > 0``) and an
        ``alt`` parametrization holding the reciprocal of the value.
        """
        fam = ParametricFamily(
            name=name or self.FAMILY_NAME,
            distr_type=UnivariateContinuous,
            distr_parametrizations=["base", "alt"],
            distribution_class=ConstantContinuousDistribution,
        )

        @parametrization(family=fam, name="base")
        class Base(Parametrization):
            value: float

            @constraint(description="value > 0")
            def check_value_positive(self) -> bool:
                return self.value > 0

        @fam.parametrization(name="alt")
        class Alt(Parametrization):
            reciprocal: float

            @constraint(description="reciprocal != 0")
            def check_reciprocal_nonzero(self) -> bool:
                return self.reciprocal != 0

            def transform_to_base_parametrization(self) -> Parametrization:
                return Base(value=1.0 / self.reciprocal)  # type: ignore[call-arg]

        return fam
