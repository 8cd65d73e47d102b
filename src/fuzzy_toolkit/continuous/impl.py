"""
Implements various membership functions by inheriting from ContinuousFuzzySet.
"""

import numbers

import numpy as np
import sympy
import torch

from fuzzy_toolkit import membership
from fuzzy_toolkit.utils.functions import Domain
from fuzzy_toolkit.continuous.abstract import ContinuousFuzzySet


EVERYWHERE = sympy.Interval(-sympy.oo, sympy.oo)


def _tighten(
    fuzzy_set: ContinuousFuzzySet, endpoint: float, alpha: float, inner: float, outer: float
) -> float:
    """
    Correct an endpoint of the alpha cut for floating point rounding. The endpoint is clamped to
    its ramp, stepped toward 'inner' (the shoulder) until its degree reaches 'alpha', and then
    stepped toward 'outer' (the foot) for as long as the next element still reaches 'alpha'.

    Args:
        fuzzy_set: The fuzzy set being cut.
        endpoint: The endpoint found by inverting the ramp.
        alpha: The threshold, between zero and one.
        inner: The shoulder of the ramp.
        outer: The foot of the ramp.

    Returns:
        The outermost element of the ramp whose membership degree is at least 'alpha'.
    """

    def degree(element: float) -> float:
        return fuzzy_set.degrees([element])[0].item()

    endpoint = min(max(endpoint, min(inner, outer)), max(inner, outer))
    while endpoint != inner and degree(endpoint) < alpha:
        endpoint = float(np.nextafter(endpoint, inner))
    while endpoint != outer:
        neighbor = float(np.nextafter(endpoint, outer))
        if degree(neighbor) < alpha:
            break
        endpoint = neighbor
    return endpoint


def linear_alpha_cut(
    fuzzy_set: ContinuousFuzzySet, alpha: float, a: float, b: float, c: float, d: float
) -> sympy.Set:
    """
    Invert the linear ramps of a trapezoid (a, b, c, d) to find the elements whose membership
    degree is at least 'alpha'. A zero-width ramp evaluates to zero at its own endpoint, so that
    endpoint is excluded from the cut whenever alpha is positive. The inverted endpoints are
    checked against the membership function of the fuzzy set, so every element of the cut has a
    degree of at least 'alpha'.

    Args:
        fuzzy_set: The fuzzy set being cut; its membership function and nucleus are consulted.
        alpha: The threshold, between zero and one.
        a: The left foot.
        b: The left shoulder.
        c: The right shoulder.
        d: The right foot.

    Returns:
        The alpha cut, as a sympy.Interval (or FiniteSet/EmptySet when it collapses).
    """
    if (
        isinstance(alpha, bool)
        or not isinstance(alpha, numbers.Real)
        or not 0.0 <= alpha <= 1.0
    ):
        fuzzy_set.reject(f"alpha must be within [0, 1], but got {alpha!r}")
    alpha = float(alpha)
    if alpha == 0.0:
        return fuzzy_set.support()
    if alpha == 1.0:
        return fuzzy_set.nucleus()
    if a == b:
        left = a
    else:
        rising_slope = 1.0 / (b - a)
        left = _tighten(
            fuzzy_set, (rising_slope * b + alpha - 1.0) / rising_slope, alpha, b, a
        )
    if c == d:
        right = c
    else:
        falling_slope = 1.0 / (d - c)
        right = _tighten(
            fuzzy_set, (falling_slope * c + 1.0 - alpha) / falling_slope, alpha, c, d
        )
    return sympy.Interval(left, right, left_open=a == b, right_open=c == d)


class Triangular(ContinuousFuzzySet):
    """
    Implementation of the Triangular membership function, written in PyTorch.
    """

    parameter_names = ("a", "b", "c")

    def __init__(self, title: str, a: float, b: float, c: float):
        super().__init__(title, a, b, c)

    @classmethod
    def validate(cls, a: float, b: float, c: float) -> None:
        cls.require_order(a=a, b=b, c=c)

    def calculate_membership(self, elements: Domain) -> torch.Tensor:
        return membership.triangular(elements, self.a, self.b, self.c)

    def support(self) -> sympy.Set:
        return sympy.Interval(self.a, self.c)

    def nucleus(self) -> sympy.Set:
        # a zero-width ramp evaluates to zero at the peak
        if self.a == self.b or self.b == self.c:
            return sympy.S.EmptySet
        return sympy.FiniteSet(self.b)

    def alpha_cut(self, alpha: float) -> sympy.Set:
        """
        The interval of elements whose membership degree is at least 'alpha'; the triangle is
        treated as a trapezoid whose plateau is the single point 'b'.

        Args:
            alpha: The threshold, between zero and one.

        Returns:
            A sympy.Interval.
        """
        return linear_alpha_cut(self, alpha, self.a, self.b, self.b, self.c)


class Trapezoidal(ContinuousFuzzySet):
    """
    Implementation of the Trapezoidal membership function, written in PyTorch.
    """

    parameter_names = ("a", "b", "c", "d")

    def __init__(self, title: str, a: float, b: float, c: float, d: float):
        super().__init__(title, a, b, c, d)

    @classmethod
    def validate(cls, a: float, b: float, c: float, d: float) -> None:
        cls.require_order(a=a, b=b, c=c, d=d)

    def calculate_membership(self, elements: Domain) -> torch.Tensor:
        return membership.trapezoidal(elements, self.a, self.b, self.c, self.d)

    def support(self) -> sympy.Set:
        return sympy.Interval(self.a, self.d)

    def nucleus(self) -> sympy.Set:
        return sympy.Interval(
            self.b, self.c, left_open=self.a == self.b, right_open=self.c == self.d
        )

    def alpha_cut(self, alpha: float) -> sympy.Set:
        return linear_alpha_cut(self, alpha, self.a, self.b, self.c, self.d)


class Gaussian(ContinuousFuzzySet):
    """
    Implementation of the Gaussian membership function, written in PyTorch. Its membership
    degree never reaches zero, so its support is the entire real line.
    """

    parameter_names = ("mean", "sd")

    def __init__(self, title: str, mean: float, sd: float):
        super().__init__(title, mean, sd)

    @classmethod
    def validate(cls, mean: float, sd: float) -> None:
        cls.require_positive(sd=sd)

    @property
    def sigma(self) -> float:
        """
        Gets the sigma for the Gaussian fuzzy set; alias for the 'sd' parameter.

        Returns:
            float
        """
        return self.sd

    def calculate_membership(self, elements: Domain) -> torch.Tensor:
        return membership.gaussian(elements, self.mean, self.sd)

    def support(self) -> sympy.Set:
        return EVERYWHERE

    def nucleus(self) -> sympy.Set:
        return sympy.FiniteSet(self.mean)


class CombinedGaussian(ContinuousFuzzySet):
    """
    Implementation of the combination of two Gaussian membership functions, written in PyTorch.
    Elements up to 'mean1' follow the first Gaussian and the rest follow the second Gaussian.
    """

    parameter_names = ("mean1", "sd1", "mean2", "sd2")

    def __init__(self, title: str, mean1: float, sd1: float, mean2: float, sd2: float):
        super().__init__(title, mean1, sd1, mean2, sd2)

    @classmethod
    def validate(cls, mean1: float, sd1: float, mean2: float, sd2: float) -> None:
        cls.require_order(mean2=mean2, mean1=mean1)
        cls.require_positive(sd1=sd1, sd2=sd2)

    def calculate_membership(self, elements: Domain) -> torch.Tensor:
        return membership.combined_gaussian(
            elements, self.mean1, self.sd1, self.mean2, self.sd2
        )

    def support(self) -> sympy.Set:
        return EVERYWHERE

    def nucleus(self) -> sympy.Set:
        # elements beyond mean1 follow the second Gaussian, which is below one there
        return sympy.FiniteSet(self.mean1)


class GeneralizedBell(ContinuousFuzzySet):
    """
    Implementation of the Generalized Bell membership function, written in PyTorch.
    """

    parameter_names = ("width", "slope", "center")

    def __init__(self, title: str, width: float, slope: float, center: float):
        super().__init__(title, width, slope, center)

    @classmethod
    def validate(cls, width: float, slope: float, center: float) -> None:
        cls.require_positive(width=width)

    def calculate_membership(self, elements: Domain) -> torch.Tensor:
        return membership.generalized_bell(elements, self.width, self.slope, self.center)

    def support(self) -> sympy.Set:
        return EVERYWHERE

    def nucleus(self) -> sympy.Set:
        if self.slope > 0:
            return sympy.FiniteSet(self.center)
        return sympy.S.EmptySet  # flat at 0.5 (slope == 0) or a dip to zero (slope < 0)


class Sigmoid(ContinuousFuzzySet):
    """
    Implementation of the Sigmoid membership function (i.e., the standard logistic curve),
    written in PyTorch. It approaches, but never attains, zero and one.
    """

    parameter_names = ("center", "width")

    def __init__(self, title: str, center: float, width: float):
        super().__init__(title, center, width)

    def calculate_membership(self, elements: Domain) -> torch.Tensor:
        return membership.sigmoid(elements, self.center, self.width)

    def support(self) -> sympy.Set:
        return EVERYWHERE

    def nucleus(self) -> sympy.Set:
        return sympy.S.EmptySet


class SShaped(ContinuousFuzzySet):
    """
    Implementation of the S-shaped membership function, written in PyTorch.
    """

    parameter_names = ("foot", "ceiling")

    def __init__(self, title: str, foot: float, ceiling: float):
        super().__init__(title, foot, ceiling)

    @classmethod
    def validate(cls, foot: float, ceiling: float) -> None:
        cls.require_order(strict=True, foot=foot, ceiling=ceiling)

    def calculate_membership(self, elements: Domain) -> torch.Tensor:
        return membership.s_shaped(elements, self.foot, self.ceiling)

    def support(self) -> sympy.Set:
        return sympy.Interval(self.foot, sympy.oo)

    def nucleus(self) -> sympy.Set:
        return sympy.Interval(self.ceiling, sympy.oo)


class ZShaped(ContinuousFuzzySet):
    """
    Implementation of the Z-shaped membership function, written in PyTorch. It descends from
    one at its 'ceiling' to zero at its 'foot', so the ceiling lies to the left of the foot.

    Note that this requires ceiling < foot (e.g., ZShaped("cold", foot=10, ceiling=0)); a
    ceiling to the right of the foot would collapse the curve into a step, and is rejected.
    """

    parameter_names = ("foot", "ceiling")

    def __init__(self, title: str, foot: float, ceiling: float):
        super().__init__(title, foot, ceiling)

    @classmethod
    def validate(cls, foot: float, ceiling: float) -> None:
        cls.require_order(strict=True, ceiling=ceiling, foot=foot)

    def calculate_membership(self, elements: Domain) -> torch.Tensor:
        return membership.z_shaped(elements, self.foot, self.ceiling)

    def support(self) -> sympy.Set:
        return sympy.Interval(-sympy.oo, self.foot)

    def nucleus(self) -> sympy.Set:
        return sympy.Interval(-sympy.oo, self.ceiling)


class PiShaped(ContinuousFuzzySet):
    """
    Implementation of the Pi-shaped membership function, written in PyTorch.
    """

    parameter_names = ("left_foot", "left_ceiling", "right_foot", "right_ceiling")

    def __init__(
        self,
        title: str,
        left_foot: float,
        left_ceiling: float,
        right_foot: float,
        right_ceiling: float,
    ):
        super().__init__(title, left_foot, left_ceiling, right_foot, right_ceiling)

    @classmethod
    def validate(
        cls,
        left_foot: float,
        left_ceiling: float,
        right_foot: float,
        right_ceiling: float,
    ) -> None:
        cls.require_order(
            left_foot=left_foot,
            left_ceiling=left_ceiling,
            right_ceiling=right_ceiling,
            right_foot=right_foot,
        )

    def calculate_membership(self, elements: Domain) -> torch.Tensor:
        return membership.pi_shaped(
            elements,
            self.left_foot,
            self.left_ceiling,
            self.right_foot,
            self.right_ceiling,
        )

    def support(self) -> sympy.Set:
        return sympy.Interval(self.left_foot, self.right_foot)

    def nucleus(self) -> sympy.Set:
        # when the left ramp has no width, its ceiling is still evaluated as the foot (zero)
        return sympy.Interval(
            self.left_ceiling,
            self.right_ceiling,
            left_open=self.left_foot == self.left_ceiling,
        )
