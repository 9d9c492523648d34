"""
Parametrization classes for distribution families.

A parametrization is a frozen dataclass holding the parameter values of one
way of describing a family (``mean``/``sd`` or ``mean``/``tau`` for the
normal family). Constraints on the values are declared with
:func:`constraint` and checked by :meth:`Parametrization.validate`; every
parametrization converts to the base one of its family.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import ABC
from dataclasses import dataclass, fields, is_dataclass
from functools import wraps
from inspect import isfunction
from typing import TYPE_CHECKING, ParamSpec

from pysatl_precise.exceptions import InvalidParameterError
from pysatl_precise.types import ParametrizationName

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, ClassVar

    from pysatl_precise.families.parametric_family import ParametricFamily


@dataclass(slots=True, frozen=True)
class ParametrizationConstraint:
    """
    Constraint on parameter values.

    Parameters
    ----------
    description : str
        Human-readable predicate, e.g. ``"sd > 0"``.
    check : Callable[[Any], bool]
        Predicate over the parametrization instance.
    """

    description: str
    check: Callable[[Any], bool]


class Parametrization(ABC):
    """
    Abstract base class for parametrizations.

    Subclasses are turned into frozen dataclasses by :func:`parametrization`.
    """

    # Set by the @parametrization decorator
    __family__: ClassVar[ParametricFamily]
    __param_name__: ClassVar[ParametrizationName]

    _constraints: ClassVar[list[ParametrizationConstraint]] = []

    @property
    def name(self) -> ParametrizationName:
        return self.__class__.__param_name__

    @property
    def parameters(self) -> dict[str, Any]:
        """Parameter values keyed by field name, in declaration order."""
        return {f.name: getattr(self, f.name) for f in fields(self)}  # type: ignore[arg-type]

    @property
    def constraints(self) -> list[ParametrizationConstraint]:
        return self._constraints

    def validate(self) -> None:
        """
        Check every constraint.

        Raises
        ------
        InvalidParameterError
            On the first constraint that does not hold. A NaN parameter fails
            every comparison and is rejected.
        """
        for constraint in self._constraints:
            if not constraint.check(self):
                raise InvalidParameterError(constraint.description, self.parameters)

    def transform_to_base_parametrization(self) -> Parametrization:
        """
        Convert to the base parametrization of the family.

        The base parametrization returns itself.
        """
        return self


P = ParamSpec("P")


def constraint(description: str) -> Callable[[Callable[P, bool]], Callable[P, bool]]:
    """
    Mark an instance method as a parameter constraint.

    Parameters
    ----------
    description : str
        Human-readable description used in the error message.
    """

    def decorator(func: Callable[P, bool]) -> Callable[P, bool]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> bool:
            return bool(func(*args, **kwargs))

        setattr(wrapper, "__is_constraint", True)
        setattr(wrapper, "__constraint_description", description)
        return wrapper

    return decorator


def _collect_constraints(cls: type[Parametrization]) -> list[ParametrizationConstraint]:
    collected: list[ParametrizationConstraint] = []
    for attr_name, attr in cls.__dict__.items():
        if isinstance(attr, staticmethod | classmethod):
            if getattr(attr.__func__, "__is_constraint", False):
                raise TypeError(f"@constraint '{attr_name}' must be an instance method")
            continue
        if isfunction(attr) and getattr(attr, "__is_constraint", False):
            description = getattr(attr, "__constraint_description", attr_name)
            collected.append(ParametrizationConstraint(description=description, check=attr))
    return collected


def parametrization(
    *,
    family: ParametricFamily,
    name: ParametrizationName,
) -> Callable[[type[Parametrization]], type[Parametrization]]:
    """
    Register a class as a parametrization of ``family``.

    The class becomes a frozen, slotted dataclass (unless it already is a
    dataclass) and its ``@constraint`` methods are collected.
    """

    def decorator(cls: type[Parametrization]) -> type[Parametrization]:
        if not is_dataclass(cls):
            cls = dataclass(slots=True, frozen=True)(cls)

        cls.__family__ = family
        cls.__param_name__ = name
        cls._constraints = _collect_constraints(cls)

        family.register_parametrization(name, cls)
        return cls

    return decorator


__all__ = [
    "ParametrizationConstraint",
    "Parametrization",
    "constraint",
    "parametrization",
]
