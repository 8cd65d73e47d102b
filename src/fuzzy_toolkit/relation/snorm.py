"""
Implements the s-norm fuzzy relations.
"""

from typing import List

from fuzzy_toolkit.utils.functions import Domain
from fuzzy_toolkit.utils.reproducibility import Config
from fuzzy_toolkit.relation.extension import fuzzify_merge
from fuzzy_toolkit.continuous.abstract import ContinuousFuzzySet, Membership


def union(
    domain: Domain, *fuzzy_sets: ContinuousFuzzySet, config: Config = None
) -> List[Membership]:
    """
    The standard union of one or more fuzzy sets, as defined by Lotfi A. Zadeh; the merged
    membership degree of each element is the maximum of its degrees.

    Args:
        domain: The ordered elements to evaluate.
        *fuzzy_sets: One or more fuzzy sets, all evaluated over the given domain.
        config: The configuration settings; defaults to the default configuration.

    Returns:
        A list with one merged Membership per element.

    Example:
        >>> union(
        ...     [10, 20, 30],
        ...     Trapezoidal("young", 0, 0, 10, 15),
        ...     Trapezoidal("young+", 10, 15, 25, 30),
        ... )
        [Membership(title='young ∪ young+', value=10, degree=1.0),
         Membership(title='young ∪ young+', value=20, degree=1.0),
         Membership(title='young ∪ young+', value=30, degree=0.0)]
    """
    return fuzzify_merge(max, domain, *fuzzy_sets, config=config)
