"""
Merges the fuzzification of a domain under several fuzzy sets into a single sequence of
Membership records, position by position. The union and intersection are built on top of this.
"""

import logging
from functools import reduce
from typing import Callable, List, Sequence

from fuzzy_toolkit.utils.functions import Domain
from fuzzy_toolkit.utils.reproducibility import Config, load_configuration
from fuzzy_toolkit.continuous.abstract import ContinuousFuzzySet, Membership


logger = logging.getLogger(__name__)


def merge_memberships(
    function: Callable[[float, float], float],
    memberships: Sequence[Membership],
    config: Config = None,
) -> Membership:
    """
    Merge the Membership records of the same element under different fuzzy sets, as a left fold
    that is seeded by the first record. The titles are joined by the configured separator and the
    value of the first record is kept.

    Args:
        function: Takes the degree of the next record and the degree merged so far, and returns
            the new merged degree (e.g., max, min).
        memberships: One Membership per fuzzy set, all at the same position of the domain.
        config: The configuration settings; defaults to the default configuration.

    Returns:
        The merged Membership.

    Example:
        >>> merge_memberships(max, [Membership("young", 7, 0.1), Membership("young+", 7, 0.7)])
        Membership(title='young ∪ young+', value=7, degree=0.7)
    """
    if config is None:
        config = load_configuration()
    separator: str = config.fuzzy.relation.separator
    return reduce(
        lambda merged, membership: merged._replace(
            title=f"{merged.title}{separator}{membership.title}",
            degree=function(membership.degree, merged.degree),
        ),
        memberships[1:],
        memberships[0],
    )


def fuzzify_merge(
    function: Callable[[float, float], float],
    domain: Domain,
    *fuzzy_sets: ContinuousFuzzySet,
    config: Config = None,
) -> List[Membership]:
    """
    Fuzzify the domain under every fuzzy set, and merge the results position by position.

    The fuzzy sets must all be evaluated over this same domain; no alignment by value is done.

    Args:
        function: The binary function that merges two membership degrees.
        domain: The ordered elements to evaluate.
        *fuzzy_sets: One or more fuzzy sets.
        config: The configuration settings; defaults to the default configuration.

    Returns:
        A list with one merged Membership per element, in the same order as the domain.
    """
    if not fuzzy_sets:
        raise ValueError("At least one fuzzy set is required to merge memberships.")
    if config is None:
        config = load_configuration()
    fuzzifications = [fuzzy_set.fuzzify(domain, config) for fuzzy_set in fuzzy_sets]
    logger.debug(
        "Merging %s over %d elements with %s",
        [fuzzy_set.title for fuzzy_set in fuzzy_sets],
        len(fuzzifications[0]),
        getattr(function, "__name__", function),
    )
    return [
        merge_memberships(function, memberships, config)
        for memberships in zip(*fuzzifications)
    ]
