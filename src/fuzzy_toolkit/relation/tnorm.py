"""
Implements the t-norm fuzzy relations.
"""

from typing import List

from fuzzy_toolkit.utils.functions import Domain
from fuzzy_toolkit.utils.reproducibility import Config
from fuzzy_toolkit.relation.extension import fuzzify_merge
from fuzzy_toolkit.continuous.abstract import ContinuousFuzzySet, Membership


def intersect(
    domain: Domain, *fuzzy_sets: ContinuousFuzzySet, config: Config = None
) -> List[Membership]:
    """
    The standard intersection of one or more fuzzy sets; the merged membership degree of each
    element is the minimum of its degrees. The titles are joined the same way as for the union.

    Args:
        domain: The ordered elements to evaluate.
        *fuzzy_sets: One or more fuzzy sets, all evaluated over the given domain.
        config: The configuration settings; defaults to the default configuration.

    Returns:
        A list with one merged Membership per element.
    """
    return fuzzify_merge(min, domain, *fuzzy_sets, config=config)
