"""
Membership functions of the shape library. Each function receives the 'elements' of a domain
(a sequence, numpy.ndarray or torch.Tensor) and the parameters of its shape, and returns a
torch.Tensor of membership degrees with the same length and order as the elements.

The functions do not validate their parameters; the fuzzy sets in fuzzy_toolkit.continuous do.
"""

from typing import List, Tuple

import torch

from fuzzy_toolkit.utils.reproducibility import tensor_dtype
from fuzzy_toolkit.utils.functions import Domain, convert_to_tensor, natural_exp


def replace_nan(tensor: torch.Tensor, value: float = 0.0) -> torch.Tensor:
    """
    Replace every value in the tensor that is not a number (e.g., the result of 0 / 0) with
    the given value. Infinite values are kept.

    Args:
        tensor: The tensor to normalize.
        value: The value substituted for NaN.

    Returns:
        The normalized tensor.
    """
    return torch.where(torch.isnan(tensor), torch.full_like(tensor, value), tensor)


def ramp(numerators: torch.Tensor, denominator: float) -> torch.Tensor:
    """
    The linear ramp term numerators / denominator. A zero-width ramp (denominator == 0) divides
    with IEEE semantics, so x / 0 is +/- infinity, and 0 / 0 contributes 0.0 instead of NaN.

    Args:
        numerators: The distances of the elements from one end of the ramp.
        denominator: The width of the ramp.

    Returns:
        The ramp term of each element.
    """
    return replace_nan(numerators / denominator)


def _as_tensor(elements: Domain) -> torch.Tensor:
    # floating point tensors keep their dtype (e.g., one chosen by a custom configuration)
    if isinstance(elements, torch.Tensor) and elements.is_floating_point():
        return elements.reshape(-1)
    return convert_to_tensor(elements, dtype=tensor_dtype())


def _piecewise(
    elements: torch.Tensor, pieces: List[Tuple[float, torch.Tensor]], otherwise: float
) -> torch.Tensor:
    # the first piece whose upper bound is at least the element decides its degree
    degrees = torch.full_like(elements, otherwise)
    for upper_bound, values in reversed(pieces):
        degrees = torch.where(elements <= upper_bound, values, degrees)
    return degrees


def triangular(elements: Domain, a: float, b: float, c: float) -> torch.Tensor:
    """
    Triangular membership function that rises linearly from 'a' to the peak 'b', and falls
    linearly from 'b' to 'c'.

    https://www.mathworks.com/help/fuzzy/trimf.html

    Args:
        elements: The elements of the domain.
        a: The left foot of the triangle.
        b: The peak of the triangle.
        c: The right foot of the triangle.

    Returns:
        The membership degrees of the elements.
    """
    elements = _as_tensor(elements)
    rising = ramp(elements - a, b - a)
    falling = ramp(c - elements, c - b)
    return torch.clamp(torch.minimum(rising, falling), min=0.0)


def trapezoidal(
    elements: Domain, a: float, b: float, c: float, d: float
) -> torch.Tensor:
    """
    Trapezoidal membership function with a flat plateau between 'b' and 'c'.

    https://www.mathworks.com/help/fuzzy/trapmf.html

    Args:
        elements: The elements of the domain.
        a: The left foot of the trapezoid.
        b: The left shoulder of the trapezoid.
        c: The right shoulder of the trapezoid.
        d: The right foot of the trapezoid.

    Returns:
        The membership degrees of the elements.
    """
    elements = _as_tensor(elements)
    rising = ramp(elements - a, b - a)
    falling = ramp(d - elements, d - c)
    plateau = torch.minimum(rising, torch.ones_like(elements))
    return torch.clamp(torch.minimum(plateau, falling), min=0.0)


def gaussian(elements: Domain, mean: float, sd: float) -> torch.Tensor:
    """
    Gaussian membership function, which peaks at one at its 'mean'.

    https://www.mathworks.com/help/fuzzy/gaussmf.html

    Args:
        elements: The elements of the domain.
        mean: The center of the Gaussian.
        sd: The standard deviation (i.e., sigma) of the Gaussian; must be positive.

    Returns:
        The membership degrees of the elements.
    """
    elements = _as_tensor(elements)
    return natural_exp(-1.0 * torch.pow(elements - mean, 2) / (2.0 * sd**2))


def combined_gaussian(
    elements: Domain, mean1: float, sd1: float, mean2: float, sd2: float
) -> torch.Tensor:
    """
    Two Gaussian curves joined together. Elements up to 'mean1' follow the first Gaussian,
    the remaining elements beyond 'mean2' follow the second Gaussian, and anything else has
    full membership.

    Args:
        elements: The elements of the domain.
        mean1: The mean of the first (left) Gaussian.
        sd1: The standard deviation of the first Gaussian.
        mean2: The mean of the second (right) Gaussian.
        sd2: The standard deviation of the second Gaussian.

    Returns:
        The membership degrees of the elements.
    """
    elements = _as_tensor(elements)
    left = gaussian(elements, mean1, sd1)
    right = gaussian(elements, mean2, sd2)
    return torch.where(
        elements <= mean1,
        left,
        torch.where(elements > mean2, right, torch.ones_like(elements)),
    )


def generalized_bell(
    elements: Domain, width: float, slope: float, center: float
) -> torch.Tensor:
    """
    Generalized bell membership function.

    https://www.mathworks.com/help/fuzzy/gbellmf.html

    Args:
        elements: The elements of the domain.
        width: The width of the bell; must be positive.
        slope: Controls how steep the sides of the bell are.
        center: The center of the bell.

    Returns:
        The membership degrees of the elements.
    """
    elements = _as_tensor(elements)
    return 1.0 / (1.0 + torch.pow(torch.abs((elements - center) / width), 2.0 * slope))


def sigmoid(elements: Domain, center: float, width: float) -> torch.Tensor:
    """
    The standard logistic curve 1 / (1 + e^(-width * (x - center))).

    Args:
        elements: The elements of the domain.
        center: The element where the membership degree is 0.5.
        width: The growth of the curve; a negative width mirrors the curve.

    Returns:
        The membership degrees of the elements.
    """
    elements = _as_tensor(elements)
    return 1.0 / (1.0 + natural_exp(-1.0 * width * (elements - center)))


def s_shaped(elements: Domain, foot: float, ceiling: float) -> torch.Tensor:
    """
    S-shaped membership function; two quadratic pieces that climb from zero at 'foot'
    to one at 'ceiling', meeting halfway between the two.

    Args:
        elements: The elements of the domain.
        foot: Where the function begins to climb from zero.
        ceiling: Where the function levels off at one.

    Returns:
        The membership degrees of the elements.
    """
    elements = _as_tensor(elements)
    span = ceiling - foot
    return _piecewise(
        elements,
        [
            (foot, torch.zeros_like(elements)),
            ((foot + ceiling) / 2.0, 2.0 * torch.pow(ramp(elements - foot, span), 2)),
            (ceiling, 1.0 - 2.0 * torch.pow(ramp(elements - ceiling, span), 2)),
        ],
        otherwise=1.0,
    )


def z_shaped(elements: Domain, foot: float, ceiling: float) -> torch.Tensor:
    """
    Z-shaped membership function; the mirror of the S-shaped membership function, which
    descends from one at 'ceiling' to zero at 'foot'.

    Args:
        elements: The elements of the domain.
        foot: Where the function reattains zero.
        ceiling: Where the function begins falling from one.

    Returns:
        The membership degrees of the elements.
    """
    elements = _as_tensor(elements)
    span = foot - ceiling
    return _piecewise(
        elements,
        [
            (ceiling, torch.ones_like(elements)),
            (
                (ceiling + foot) / 2.0,
                1.0 - 2.0 * torch.pow(ramp(elements - ceiling, span), 2),
            ),
            (foot, 2.0 * torch.pow(ramp(elements - foot, span), 2)),
        ],
        otherwise=0.0,
    )


def pi_shaped(
    elements: Domain,
    left_foot: float,
    left_ceiling: float,
    right_foot: float,
    right_ceiling: float,
) -> torch.Tensor:
    """
    Pi-shaped membership function; an S-shaped climb on the left, a plateau of full
    membership, and a Z-shaped descent on the right.

    Args:
        elements: The elements of the domain.
        left_foot: Where the function begins to climb from zero.
        left_ceiling: Where the function levels off at one.
        right_foot: Where the function reattains zero.
        right_ceiling: Where the function begins falling from one.

    Returns:
        The membership degrees of the elements.
    """
    elements = _as_tensor(elements)
    left_span = left_ceiling - left_foot
    right_span = right_foot - right_ceiling
    return _piecewise(
        elements,
        [
            (left_foot, torch.zeros_like(elements)),
            (
                (left_foot + left_ceiling) / 2.0,
                2.0 * torch.pow(ramp(elements - left_foot, left_span), 2),
            ),
            (
                left_ceiling,
                1.0 - 2.0 * torch.pow(ramp(elements - left_ceiling, left_span), 2),
            ),
            (right_ceiling, torch.ones_like(elements)),
            (
                (right_ceiling + right_foot) / 2.0,
                1.0 - 2.0 * torch.pow(ramp(elements - right_ceiling, right_span), 2),
            ),
            (right_foot, 2.0 * torch.pow(ramp(elements - right_foot, right_span), 2)),
        ],
        otherwise=0.0,
    )
