"""
Implements the standard complement of a fuzzy set.
"""

from typing import Iterable, List

from fuzzy_toolkit.utils.functions import Domain
from fuzzy_toolkit.utils.reproducibility import Config, load_configuration
from fuzzy_toolkit.continuous.abstract import ContinuousFuzzySet, Membership


def complement_memberships(
    memberships: Iterable[Membership], config: Config = None
) -> List[Membership]:
    """
    Complement Membership records that were already calculated, such as the result of a union.

    Args:
        memberships: The Membership records to complement.
        config: The configuration settings; defaults to the default configuration.

    Returns:
        A list with one Membership per record, where the degree is one minus the original degree,
        and the title is prefixed with the configured prefix ('complement ').
    """
    if config is None:
        config = load_configuration()
    prefix: str = config.fuzzy.complement.prefix
    return [
        membership._replace(
            title=f"{prefix}{membership.title}", degree=1.0 - membership.degree
        )
        for membership in memberships
    ]


def complement(
    domain: Domain, fuzzy_set: ContinuousFuzzySet, config: Config = None
) -> List[Membership]:
    """
    Obtains the standard complement of a fuzzy set as defined by Lotfi A. Zadeh, over the domain.

    Args:
        domain: The ordered elements to evaluate.
        fuzzy_set: The fuzzy set to complement.
        config: The configuration settings; defaults to the default configuration.

    Returns:
        A list with one Membership per element of the domain.
    """
    return complement_memberships(fuzzy_set.fuzzify(domain, config), config)
