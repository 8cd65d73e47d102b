"""
The errors raised by the fuzzy toolkit.
"""


class FuzzyError(Exception):
    """Domain error for the fuzzy toolkit."""


class InvalidParameters(FuzzyError, ValueError):
    """
    The parameters given to a fuzzy set (or to one of its operations, such as the alpha cut)
    violate the ordering or positivity that its membership function requires.
    """
