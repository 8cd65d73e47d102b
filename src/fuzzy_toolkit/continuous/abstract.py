"""
Implements an abstract class called ContinuousFuzzySet using PyTorch. All fuzzy sets defined over
a continuous domain are derived from this class. Further, the Membership class is defined within,
which is the record produced for every element of a domain when it is fuzzified.
"""

import numbers
import logging
from types import MappingProxyType
from collections import namedtuple
from abc import abstractmethod, ABC
from typing import Any, List, Mapping, NoReturn, Tuple, Type, Union

import sympy
import torch

from fuzzy_toolkit.exceptions import InvalidParameters
from fuzzy_toolkit.membership import replace_nan
from fuzzy_toolkit.utils.functions import (
    Domain,
    all_subclasses,
    convert_to_list,
    convert_to_tensor,
)
from fuzzy_toolkit.utils.reproducibility import Config, load_configuration, tensor_dtype


logger = logging.getLogger(__name__)


class Membership(
    namedtuple(typename="Membership", field_names=("title", "value", "degree"))
):
    """
    The Membership class describes how strongly a single element of a domain (the *value*)
    belongs to the fuzzy set named *title*, as its membership *degree*.

    Fuzzifying a domain produces one Membership per element, in the same order as the domain.
    The set operations (e.g., union, intersection) merge these records position by position,
    so the *value* is carried along to keep track of the original element.
    """


class ContinuousFuzzySet(ABC):
    """
    A generic and abstract class that implements continuous fuzzy sets.

    Defined here are the common methods made available to all fuzzy sets: fuzzification of a
    domain, the support, the nucleus, and the alpha cut. A fuzzy set is identified by its title
    and the parameters of its shape; it is immutable once created.

    Subclasses list the names of their shape parameters in 'parameter_names', validate them in
    'validate', and implement 'calculate_membership', 'support' and 'nucleus'.
    """

    parameter_names: Tuple[str, ...] = ()

    def __init__(self, title: str, *parameters: float):
        if not isinstance(title, str):
            raise InvalidParameters(
                f"The title of a fuzzy set must be a str, but got {type(title).__name__}"
            )
        if len(parameters) != len(self.parameter_names):
            raise InvalidParameters(
                f"{type(self).__name__} expects {len(self.parameter_names)} parameters "
                f"{self.parameter_names}, but got {len(parameters)}"
            )
        for name, value in zip(self.parameter_names, parameters):
            # bool is a numbers.Real, but it is not a sensible shape parameter
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise InvalidParameters(
                    f"The parameter '{name}' of {type(self).__name__} must be a real number, "
                    f"but got {value!r}"
                )
        values = tuple(float(value) for value in parameters)
        self.validate(*values)
        object.__setattr__(self, "_title", title)
        object.__setattr__(
            self, "_parameters", dict(zip(self.parameter_names, values))
        )
        logger.debug("Created %r", self)

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise AttributeError(
            f"{type(self).__name__} is immutable; cannot set the attribute '{name}'"
        )

    def __getattr__(self, name: str) -> float:
        # only called when normal attribute lookup fails, e.g., for the shape parameters
        parameters = self.__dict__.get("_parameters", {})
        if name in parameters:
            return parameters[name]
        raise AttributeError(
            f"'{type(self).__name__}' object has no attribute '{name}'"
        )

    @classmethod
    def reject(cls, message: str) -> NoReturn:
        """
        Reject the parameters given to this type of fuzzy set.

        Args:
            message: Describes which requirement the parameters violate.

        Returns:
            Never returns; always raises InvalidParameters.
        """
        logger.debug("Rejected the parameters of %s: %s", cls.__name__, message)
        raise InvalidParameters(f"{cls.__name__}: {message}")

    @classmethod
    def validate(cls, *parameters: float) -> None:
        """
        Check the shape parameters before the fuzzy set is created; by default, anything goes.

        Args:
            *parameters: The shape parameters, in the order of 'parameter_names'.

        Returns:
            None
        """

    @classmethod
    def require_order(cls, strict: bool = False, **parameters: float) -> None:
        """
        Require the given parameters to be in ascending order.

        Args:
            strict: Whether neighboring parameters must differ.
            **parameters: The parameters keyed by their names, in the order they must be in.

        Returns:
            None
        """
        values = list(parameters.values())
        for lower, upper in zip(values, values[1:]):
            if lower > upper or (strict and lower == upper):
                relation = " < " if strict else " <= "
                cls.reject(
                    f"the parameters must satisfy {relation.join(parameters)}, "
                    f"but got {dict(parameters)}"
                )

    @classmethod
    def require_positive(cls, **parameters: float) -> None:
        """
        Require each of the given parameters to be strictly positive.

        Args:
            **parameters: The parameters, keyed by their names.

        Returns:
            None
        """
        for name, value in parameters.items():
            if not value > 0.0:
                cls.reject(f"'{name}' must be strictly positive, but got {value}")

    @property
    def title(self) -> str:
        """
        The human-readable title of the fuzzy set (e.g., 'young').

        Returns:
            str
        """
        return self._title

    @property
    def parameters(self) -> Mapping[str, float]:
        """
        The shape parameters of the fuzzy set, keyed by their names.

        Returns:
            A read-only mapping.
        """
        return MappingProxyType(self._parameters)

    def __eq__(self, other: Any) -> bool:
        """
        Check if the fuzzy set is equal to another fuzzy set.

        Args:
            other: The other fuzzy set to compare to.

        Returns:
            True if the fuzzy sets are equal, False otherwise.
        """
        return (
            type(other) is type(self)
            and self.title == other.title
            and self._parameters == other._parameters
        )

    def __hash__(self):
        return hash((type(self), self.title, tuple(self._parameters.items())))

    def __repr__(self) -> str:
        parameters = ", ".join(
            f"{name}={value}" for name, value in self._parameters.items()
        )
        return f"{type(self).__name__}({self.title!r}, {parameters})"

    @staticmethod
    def get_subclass(class_name: str) -> Union[NoReturn, Type["ContinuousFuzzySet"]]:
        """
        Get the subclass of ContinuousFuzzySet with the given class name.

        Args:
            class_name: The name of the subclass of ContinuousFuzzySet.

        Returns:
            A subclass of ContinuousFuzzySet.
        """
        for subclass in all_subclasses(ContinuousFuzzySet):
            if subclass.__name__ == class_name:
                return subclass
        raise ValueError(
            f"The fuzzy set class {class_name} was not found in the subclasses of "
            f"ContinuousFuzzySet. Please ensure that the fuzzy set class is a subclass of "
            f"ContinuousFuzzySet."
        )

    @abstractmethod
    def calculate_membership(self, elements: Domain) -> torch.Tensor:
        """
        Calculate the membership of the elements to this fuzzy set; not implemented as this is a
        generic and abstract class. This method is overridden by a class that specifies the type
        of fuzzy set (e.g., Gaussian, Triangular).

        Args:
            elements: The elements of the domain.

        Returns:
            The membership degrees, possibly containing NaN.
        """
        raise NotImplementedError(
            "The ContinuousFuzzySet has no defined membership function. Please create a class and "
            "inherit from ContinuousFuzzySet, or use a predefined class, such as Gaussian."
        )

    @abstractmethod
    def support(self) -> sympy.Set:
        """
        The closed interval outside which the membership degree is guaranteed to be zero.

        Returns:
            A sympy.Set; fuzzy sets with unbounded support return an infinite sympy.Interval.
        """

    @abstractmethod
    def nucleus(self) -> sympy.Set:
        """
        The point or interval where the membership degree is guaranteed to be one.

        Returns:
            A sympy.Set (e.g., FiniteSet for a single point, or EmptySet).
        """

    def alpha_cut(self, alpha: float) -> Union[NoReturn, sympy.Interval]:
        """
        The interval of elements whose membership degree is at least 'alpha'.

        Args:
            alpha: The threshold, between zero and one.

        Returns:
            A sympy.Interval.
        """
        raise NotImplementedError(
            f"The alpha cut is not defined for {type(self).__name__}; it is only available for "
            f"fuzzy sets built from linear ramps, such as Triangular or Trapezoidal."
        )

    def degrees(self, domain: Domain, config: Config = None) -> torch.Tensor:
        """
        Calculate the membership degrees of the domain, where degrees that are not a number
        (e.g., due to a zero-width ramp) are replaced by the configured value (zero).

        Args:
            domain: The ordered elements to evaluate.
            config: The configuration settings; defaults to the default configuration.

        Returns:
            A one-dimensional torch.Tensor with one membership degree per element, of the
            configured floating point type.
        """
        if config is None:
            config = load_configuration()
        elements = convert_to_tensor(domain, dtype=tensor_dtype(config))
        degrees: torch.Tensor = self.calculate_membership(elements)
        nan_mask = torch.isnan(degrees)
        if nan_mask.any():
            logger.debug(
                "Replaced %d NaN membership degrees of %r",
                int(nan_mask.sum().item()),
                self.title,
            )
            degrees = replace_nan(degrees, value=config.fuzzy.nan_replacement)
        return degrees

    def fuzzify(self, domain: Domain, config: Config = None) -> List[Membership]:
        """
        Fuzzify the domain into Membership records tagged with the title of this fuzzy set.

        Args:
            domain: The ordered elements to evaluate.
            config: The configuration settings; defaults to the default configuration.

        Returns:
            A list with one Membership per element, in the same order as the domain.
        """
        return [
            Membership(title=self.title, value=value, degree=degree)
            for value, degree in zip(
                convert_to_list(domain), self.degrees(domain, config).tolist()
            )
        ]
