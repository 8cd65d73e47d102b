"""
Fuzzy Toolkit
-------------

A library of membership function shapes that are queried uniformly as fuzzy sets
(fuzzify, support, nucleus, alpha cut), and combined with the standard union,
intersection and complement.

"""

import logging

__version__ = "0.1.0"
__all__ = ['ContinuousFuzzySet', 'Membership', 'Triangular', 'Trapezoidal', 'Gaussian', 'CombinedGaussian',
           'GeneralizedBell', 'Sigmoid', 'SShaped', 'ZShaped', 'PiShaped', 'union', 'intersect', 'complement',
           'complement_memberships', 'fuzzify_merge', 'FuzzyError', 'InvalidParameters', 'load_configuration']

from .exceptions import FuzzyError, InvalidParameters
from .utils.reproducibility import load_configuration
from .continuous.abstract import ContinuousFuzzySet, Membership
from .continuous.impl import Triangular, Trapezoidal, Gaussian, CombinedGaussian, GeneralizedBell, Sigmoid, \
    SShaped, ZShaped, PiShaped
from .relation.extension import fuzzify_merge
from .relation.snorm import union
from .relation.tnorm import intersect
from .relation.complement import complement, complement_memberships

logging.getLogger(__name__).addHandler(logging.NullHandler())
