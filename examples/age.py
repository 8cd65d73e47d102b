"""
Demo of combining fuzzy sets for a toy task regarding age.
"""
from fuzzy_toolkit import Trapezoidal, SShaped, union, intersect, complement


def young():
    """
    Create a fuzzy set for the linguistic term 'young'.

    Returns:
        Trapezoidal
    """
    return Trapezoidal("young", 0, 0, 10, 15)


def young_plus():
    """
    Create a fuzzy set for the linguistic term 'young+'.

    Returns:
        Trapezoidal
    """
    return Trapezoidal("young+", 10, 15, 25, 30)


def old():
    """
    Create a fuzzy set for the linguistic term 'old'.

    Returns:
        SShaped
    """
    return SShaped("old", 45, 65)


AGES = [10, 20, 30, 40, 50, 60, 70]


if __name__ == "__main__":
    for membership in union(AGES, young(), young_plus()):
        print(membership)
    for membership in intersect(AGES, young_plus(), old()):
        print(membership)
    for membership in complement(AGES, old()):
        print(membership)
