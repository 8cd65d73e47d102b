"""
Test the union, intersection and complement of continuous fuzzy sets over a shared domain.
"""

import pathlib
import tempfile
import unittest

import torch
import numpy as np

from fuzzy_toolkit.utils.reproducibility import (
    set_rng,
    load_and_override_default_configuration,
)
from fuzzy_toolkit.continuous.abstract import Membership
from fuzzy_toolkit.continuous.impl import Gaussian, Triangular, Trapezoidal
from fuzzy_toolkit.relation.snorm import union
from fuzzy_toolkit.relation.tnorm import intersect
from fuzzy_toolkit.relation.extension import fuzzify_merge, merge_memberships
from fuzzy_toolkit.relation.complement import complement, complement_memberships
from examples.age import AGES, young, young_plus, old


def degrees(memberships):
    return [membership.degree for membership in memberships]


class TestStandardUnion(unittest.TestCase):
    def test_young_or_young_plus(self) -> None:
        """
        Test the union of two trapezoids, where the first has a zero-width left ramp.

        Returns:
            None
        """
        memberships = union([10, 20, 30], young(), young_plus())
        assert degrees(memberships) == [1.0, 1.0, 0.0]
        assert all(membership.title == "young ∪ young+" for membership in memberships)
        assert [membership.value for membership in memberships] == [10, 20, 30]

    def test_commutative(self) -> None:
        """
        Test that the order of the fuzzy sets changes the merged title, but not the degrees.

        Returns:
            None
        """
        assert degrees(union(AGES, young(), old())) == degrees(union(AGES, old(), young()))
        assert union(AGES, old(), young())[0].title == "old ∪ young"

    def test_against_numpy(self) -> None:
        """
        Test that the union is the elementwise maximum of the membership degrees.

        Returns:
            None
        """
        set_rng(0)
        domain = np.random.uniform(-5.0, 15.0, size=100)
        fuzzy_sets = [
            Triangular("a", 0, 2, 6),
            Gaussian("b", 5, 2),
            Trapezoidal("c", 4, 8, 10, 14),
        ]
        expected = np.max(
            np.stack([fuzzy_set.degrees(domain).numpy() for fuzzy_set in fuzzy_sets]),
            axis=0,
        )
        memberships = union(domain, *fuzzy_sets)
        assert np.allclose(degrees(memberships), expected)
        assert memberships[0].title == "a ∪ b ∪ c"


class TestStandardIntersection(unittest.TestCase):
    def test_against_numpy(self) -> None:
        """
        Test that the intersection is the elementwise minimum of the membership degrees, and that
        the titles are joined the same way as for the union.

        Returns:
            None
        """
        set_rng(0)
        domain = np.random.uniform(-5.0, 15.0, size=100)
        fuzzy_sets = [Triangular("a", 0, 2, 6), Gaussian("b", 5, 2)]
        expected = np.min(
            np.stack([fuzzy_set.degrees(domain).numpy() for fuzzy_set in fuzzy_sets]),
            axis=0,
        )
        memberships = intersect(domain, *fuzzy_sets)
        assert np.allclose(degrees(memberships), expected)
        assert memberships[0].title == "a ∪ b"

    def test_young_plus_and_old(self) -> None:
        # the two terms never overlap
        memberships = intersect(AGES, young_plus(), old())
        assert degrees(memberships) == [0.0] * len(AGES)

    def test_intersection_is_below_union(self) -> None:
        """
        Test that no element belongs to the intersection more than it belongs to the union.

        Returns:
            None
        """
        domain = np.linspace(0.0, 80.0, 161)
        for lower, upper in zip(
            intersect(domain, young(), young_plus(), old()),
            union(domain, young(), young_plus(), old()),
        ):
            assert lower.degree <= upper.degree


class TestFuzzifyMerge(unittest.TestCase):
    def test_zero_fuzzy_sets(self) -> None:
        with self.assertRaises(ValueError):
            union(AGES)
        with self.assertRaises(ValueError):
            intersect(AGES)

    def test_one_fuzzy_set(self) -> None:
        """
        Test that merging a single fuzzy set degenerates to its own fuzzification.

        Returns:
            None
        """
        assert union(AGES, old()) == old().fuzzify(AGES)
        assert intersect(AGES, old()) == old().fuzzify(AGES)

    def test_empty_domain(self) -> None:
        assert union([], young(), old()) == []

    def test_zero_dimensional_domain(self) -> None:
        """
        Test that a single element given as a zero-dimensional tensor is merged like any domain.

        Returns:
            None
        """
        memberships = union(torch.tensor(12.5), young(), young_plus())
        assert memberships == [
            Membership(title="young ∪ young+", value=12.5, degree=0.5)
        ]

    def test_custom_function(self) -> None:
        """
        Test that any binary function can merge the membership degrees (e.g., the product).

        Returns:
            None
        """
        memberships = fuzzify_merge(
            lambda degree, merged: degree * merged, [12.5, 20], young(), young_plus()
        )
        assert degrees(memberships) == [0.25, 0.0]

    def test_logging(self) -> None:
        with self.assertLogs("fuzzy_toolkit.relation.extension", level="DEBUG"):
            union(AGES, young(), old())

    def test_merge_memberships(self) -> None:
        """
        Test that merging keeps the value of the first record.

        Returns:
            None
        """
        merged = merge_memberships(
            max, [Membership("young", 7, 0.1), Membership("young+", 7, 0.7)]
        )
        assert merged == Membership(title="young ∪ young+", value=7, degree=0.7)


class TestStandardComplement(unittest.TestCase):
    def test_complement(self) -> None:
        """
        Test the complement of the S-shaped 'old' fuzzy set.

        Returns:
            None
        """
        memberships = complement([40, 55, 70], old())
        assert memberships == [
            Membership(title="complement old", value=40, degree=1.0),
            Membership(title="complement old", value=55, degree=0.5),
            Membership(title="complement old", value=70, degree=0.0),
        ]

    def test_double_negation(self) -> None:
        """
        Test that complementing twice restores the membership degrees.

        Returns:
            None
        """
        domain = np.linspace(0.0, 80.0, 81)
        original = union(domain, young(), young_plus())
        twice = complement_memberships(complement_memberships(original))
        assert twice[0].title == "complement complement young ∪ young+"
        for before, after in zip(original, twice):
            self.assertAlmostEqual(before.degree, after.degree)


class TestCustomConfiguration(unittest.TestCase):
    """
    Test that a configuration merged on top of the defaults reaches the set operations.
    """

    def setUp(self) -> None:
        directory = tempfile.TemporaryDirectory()
        self.addCleanup(directory.cleanup)
        path = pathlib.Path(directory.name) / "custom.yaml"
        path.write_text(
            "fuzzy:\n"
            "  nan_replacement: 0.25\n"
            "  relation:\n"
            '    separator: " | "\n'
            "  complement:\n"
            '    prefix: "not "\n'
            "tensor:\n"
            "  dtype: float32\n",
            encoding="utf-8",
        )
        self.config = load_and_override_default_configuration(path)

    def test_separator(self) -> None:
        """
        Test that the configured separator joins the titles of the union and the intersection.

        Returns:
            None
        """
        memberships = union([10, 20, 30], young(), young_plus(), config=self.config)
        assert [membership.title for membership in memberships] == ["young | young+"] * 3
        assert degrees(memberships) == [1.0, 1.0, 0.0]
        memberships = intersect(AGES, young_plus(), old(), config=self.config)
        assert memberships[0].title == "young+ | old"
        # the defaults are untouched
        assert union([10], young(), young_plus())[0].title == "young ∪ young+"

    def test_prefix(self) -> None:
        memberships = complement([40, 70], old(), config=self.config)
        assert [membership.title for membership in memberships] == ["not old", "not old"]
        assert degrees(memberships) == [1.0, 0.0]

    def test_nan_replacement_and_dtype(self) -> None:
        """
        Test that the degrees are evaluated with the configured floating point type, and that
        NaN (e.g., of an undefined element) is replaced with the configured value.

        Returns:
            None
        """
        bell = Gaussian("bell", 0, 1)
        assert bell.degrees([0.0, 1.0], config=self.config).dtype == torch.float32
        domain = [0.0, float("nan")]
        assert degrees(bell.fuzzify(domain, config=self.config)) == [1.0, 0.25]
        assert degrees(union(domain, bell, config=self.config)) == [1.0, 0.25]
        assert degrees(bell.fuzzify(domain)) == [1.0, 0.0]
