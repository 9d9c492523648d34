"""
Members shared by the distributions of built-in families.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import abstractmethod
from typing import TYPE_CHECKING, Self, cast

from pysatl_precise.families.registry import ParametricFamilyRegister

if TYPE_CHECKING:
    from typing import Any, ClassVar

    from pysatl_precise.families.parametric_family import ParametricFamily


class ParametricFamilyDistribution:
    """
    Mixin for a distribution created by a :class:`ParametricFamily`.

    Instances are values: two distributions of the same class with equal
    parameters compare equal.
    """

    family_name: ClassVar[str]

    @property
    @abstractmethod
    def parameters(self) -> dict[str, Any]:
        """Parameters in the base parametrization of the family."""

    @classmethod
    def _from_family(cls, **values: Any) -> Self:
        """Build through the registered family so that ``values`` are validated."""
        return cast(Self, ParametricFamilyRegister.get(cls.family_name)(**values))

    @property
    def family(self) -> ParametricFamily:
        """
        The family this distribution belongs to.

        Raises
        ------
        ValueError
            If the family is not registered.
        """
        return ParametricFamilyRegister.get(self.family_name)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.parameters == cast(Self, other).parameters

    def __hash__(self) -> int:
        return hash((type(self), tuple(self.parameters.items())))

    def __repr__(self) -> str:
        args = ", ".join(f"{key}={value!r}" for key, value in self.parameters.items())
        return f"{type(self).__name__}({args})"


__all__ = [
    "ParametricFamilyDistribution",
]
