"""
Parametric family definitions.

A :class:`ParametricFamily` ties together the parametrizations of one named
family and the distribution class built from the base parametrization. It is
the validating factory of the family: parameters are checked once, at
construction, and never after.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, dataclass_transform

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

    from pysatl_precise.distributions.distribution import Distribution
    from pysatl_precise.families.parametrizations import Parametrization
    from pysatl_precise.types import DistributionType, ParametrizationName


class ParametricFamily:
    """
    A family of distributions with multiple parametrizations.

    Parameters
    ----------
    name : str
        Name of the family.
    distr_type : DistributionType
        Type of every distribution of the family.
    distr_parametrizations : list[ParametrizationName]
        Parametrization names; the first one is the base parametrization.
    distribution_class : Callable[..., Distribution]
        Constructor called with the fields of the base parametrization as
        keyword arguments. It does not validate.
    """

    def __init__(
        self,
        name: str,
        distr_type: DistributionType,
        distr_parametrizations: list[ParametrizationName],
        distribution_class: Callable[..., Distribution[Any]],
    ):
        self._name = name
        self._distr_type = distr_type
        self._distribution_class = distribution_class

        # Ordered names; the first one is the base parametrization name
        self.parametrization_names: list[ParametrizationName] = distr_parametrizations
        self.base_parametrization_name: ParametrizationName = self.parametrization_names[0]

        self._parametrizations: dict[ParametrizationName, type[Parametrization]] = {}

    @property
    def name(self) -> str:
        return self._name

    @property
    def distribution_type(self) -> DistributionType:
        return self._distr_type

    @property
    def parametrizations(self) -> dict[ParametrizationName, type[Parametrization]]:
        """Mapping from parametrization names to classes."""
        return self._parametrizations

    @property
    def base(self) -> type[Parametrization]:
        """
        Base parametrization class.

        Raises
        ------
        ValueError
            If the base parametrization is not registered.
        """
        try:
            return self._parametrizations[self.base_parametrization_name]
        except KeyError as exc:
            raise ValueError(
                f"Base parametrization '{self.base_parametrization_name}' is not registered."
            ) from exc

    def register_parametrization(
        self,
        name: ParametrizationName,
        parametrization_class: type[Parametrization],
    ) -> None:
        """
        Register a parametrization class.

        Raises
        ------
        ValueError
            If the name is unknown to the family or already registered.
        """
        if name not in self.parametrization_names:
            raise ValueError(f"Parametrization '{name}' is not declared by family {self.name}.")
        if name in self._parametrizations:
            raise ValueError(f"Parametrization '{name}' is already registered.")
        self._parametrizations[name] = parametrization_class

    def get_parametrization(self, name: ParametrizationName) -> type[Parametrization]:
        """
        Fetch a parametrization class by name.

        Raises
        ------
        KeyError
            If name is not registered.
        """
        return self._parametrizations[name]

    def to_base(self, parameters: Parametrization) -> Parametrization:
        """Convert parameters to the base parametrization."""
        if parameters.name == self.base_parametrization_name:
            return parameters
        return parameters.transform_to_base_parametrization()

    def distribution(
        self,
        parametrization_name: ParametrizationName | None = None,
        **parameters_values: Any,
    ) -> Distribution[Any]:
        """
        Create a distribution from parameter values.

        Parameters
        ----------
        parametrization_name : str, optional
            Parametrization of the values (defaults to the base one).
        **parameters_values
            Parameter values.

        Returns
        -------
        Distribution
            Immutable distribution instance.

        Raises
        ------
        KeyError
            If the parametrization name is not registered.
        InvalidParameterError
            If the values do not satisfy a constraint of the parametrization
            or of the base parametrization they convert to.
        """
        if parametrization_name is None:
            parametrization_class = self.base
        else:
            parametrization_class = self._parametrizations[parametrization_name]

        parameters = parametrization_class(**parameters_values)
        parameters.validate()
        base_parameters = self.to_base(parameters)
        if base_parameters is not parameters:
            base_parameters.validate()
        return self._distribution_class(**base_parameters.parameters)

    @dataclass_transform()
    def parametrization(
        self, *, name: ParametrizationName
    ) -> Callable[[type[Parametrization]], type[Parametrization]]:
        """Class decorator registering a parametrization of this family."""
        from pysatl_precise.families.parametrizations import parametrization as _param_deco

        return _param_deco(family=self, name=name)

    __call__ = distribution


__all__ = [
    "ParametricFamily",
]
