"""
Utility functions, such as converting a domain of elements into a torch.Tensor.
"""

from typing import Any, List, Set, Union, Sequence

import torch
import numpy as np


Domain = Union[Sequence[float], np.ndarray, torch.Tensor]


def convert_to_tensor(
    values: Domain, dtype: torch.dtype = torch.float64
) -> torch.Tensor:
    """
    If the given values are not torch.Tensor, convert them to torch.Tensor.

    Args:
        values: Values such as the elements of a domain, or the parameters of a fuzzy set.
        dtype: The floating point type the resulting tensor should have.

    Returns:
        A one-dimensional torch.Tensor (possibly empty) with the given dtype.
    """
    if isinstance(values, torch.Tensor):
        return values.to(dtype=dtype).reshape(-1)
    return torch.as_tensor(np.asarray(values, dtype=np.float64), dtype=dtype).reshape(
        -1
    )


def convert_to_list(values: Domain) -> List[Any]:
    """
    Recover the elements of a domain as plain Python objects, in their original order.

    Args:
        values: The domain, as a sequence, numpy.ndarray or torch.Tensor.

    Returns:
        A list with one entry per element of the domain.
    """
    if isinstance(values, (torch.Tensor, np.ndarray)):
        return values.reshape(-1).tolist()
    return list(values)


def natural_exp(exponents: torch.Tensor) -> torch.Tensor:
    """
    Euler's number raised to the given exponents. Used by the membership functions that are
    defined through an exponential form (e.g., Gaussian, Sigmoid).

    Args:
        exponents: The exponents.

    Returns:
        e ** exponents, elementwise.
    """
    return torch.exp(exponents)


def all_subclasses(cls) -> Set[Any]:
    """
    Get all subclasses of the given class, recursively.

    Returns:
        A set of all subclasses of the given class.
    """
    return {cls}.union(s for c in cls.__subclasses__() for s in all_subclasses(c))
