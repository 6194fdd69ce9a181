"""
Tests for linear and binary search
"""

import random
import unittest

from search_sampler.core.exceptions import InvalidSequenceError, UnsortedSequenceError
from search_sampler.search.binary import (
    binary_search_counted,
    binary_search_index,
    find_unsorted_position,
)
from search_sampler.search.linear import (
    Match,
    linear_search_bool,
    linear_search_counted,
    linear_search_index,
    linear_search_val_and_index,
)


class TestLinearSearch(unittest.TestCase):
    """Test cases for the three linear search shapes"""

    def setUp(self):
        """Set up test fixtures"""
        self.numbers = [1, 3, 5, 7, 9]

    def test_bool_found_and_missing(self):
        """Test boolean result at the ends, the middle and when absent"""
        self.assertTrue(linear_search_bool(self.numbers, 1))
        self.assertTrue(linear_search_bool(self.numbers, 5))
        self.assertTrue(linear_search_bool(self.numbers, 9))
        self.assertFalse(linear_search_bool(self.numbers, 6))

    def test_bool_with_booleans(self):
        """Test searching a list of booleans"""
        self.assertTrue(linear_search_bool([True, False, True], True))
        self.assertTrue(linear_search_bool([True, False, True], False))

    def test_index(self):
        """Test index result"""
        self.assertEqual(linear_search_index(self.numbers, 1), 0)
        self.assertEqual(linear_search_index(self.numbers, 5), 2)
        self.assertEqual(linear_search_index(self.numbers, 9), 4)
        self.assertEqual(linear_search_index(self.numbers, 6), -1)

    def test_index_first_occurrence(self):
        """Test that duplicates resolve to the lowest index"""
        self.assertEqual(linear_search_index([1, 3, 5, 5, 5, 7, 9], 5), 2)
        self.assertEqual(linear_search_index([10, 20, 30, 30, 40], 30), 2)

    def test_index_compares_by_equality(self):
        """Test that equal but distinct objects match"""
        items = [{"id": 1}, {"id": 2}, {"id": 3}]
        self.assertEqual(linear_search_index(items, {"id": 2}), 1)
        self.assertEqual(linear_search_index(items, {"id": 4}), -1)

    def test_index_strings(self):
        """Test searching strings"""
        fruits = ["apple", "banana", "cherry", "date"]
        self.assertEqual(linear_search_index(fruits, "cherry"), 2)
        self.assertEqual(linear_search_index(fruits, "grape"), -1)

    def test_val_and_index(self):
        """Test match record result"""
        self.assertEqual(linear_search_val_and_index([10, 20, 30, 40], 30), Match(index=2, value=30))
        self.assertEqual(linear_search_val_and_index([10, 20, 30, 30, 40], 30), Match(index=2, value=30))
        self.assertIsNone(linear_search_val_and_index([10, 20, 30, 40], 50))

    def test_val_and_index_to_dict(self):
        """Test match record serialization"""
        match = linear_search_val_and_index(["apple", "banana"], "banana")
        self.assertEqual(match.to_dict(), {"index": 1, "value": "banana"})

    def test_empty_sequence(self):
        """Test that an empty sequence finds nothing"""
        self.assertFalse(linear_search_bool([], 5))
        self.assertEqual(linear_search_index([], 5), -1)
        self.assertIsNone(linear_search_val_and_index([], 5))

    def test_single_element(self):
        """Test single element sequences"""
        self.assertEqual(linear_search_index([5], 5), 0)
        self.assertEqual(linear_search_index([5], 3), -1)
        self.assertEqual(linear_search_val_and_index([5], 5), Match(index=0, value=5))

    def test_counted(self):
        """Test comparison counting"""
        self.assertEqual(linear_search_counted(self.numbers, 5), (2, 3))
        self.assertEqual(linear_search_counted(self.numbers, 6), (-1, 5))
        self.assertEqual(linear_search_counted([], 6), (-1, 0))

    def test_invalid_sequence(self):
        """Test that non-sequences fail fast"""
        with self.assertRaises(InvalidSequenceError):
            linear_search_index({1, 2, 3}, 2)
        with self.assertRaises(TypeError):
            linear_search_bool(42, 2)

    def test_index_property(self):
        """Test -1 iff absent, otherwise the smallest matching index"""
        rng = random.Random(7)
        for _ in range(200):
            sequence = [rng.randint(0, 9) for _ in range(rng.randint(0, 20))]
            target = rng.randint(0, 10)
            index = linear_search_index(sequence, target)
            if target in sequence:
                self.assertEqual(sequence[index], target)
                self.assertNotIn(target, sequence[:index])
            else:
                self.assertEqual(index, -1)

    def test_repeated_calls_agree(self):
        """Test that searches keep no state between calls"""
        first = linear_search_index(self.numbers, 7)
        for _ in range(5):
            self.assertEqual(linear_search_index(self.numbers, 7), first)


class TestBinarySearch(unittest.TestCase):
    """Test cases for binary search"""

    def setUp(self):
        """Set up test fixtures"""
        self.odds = [1, 3, 5, 7, 9, 11]

    def test_basic(self):
        """Test finding elements at the ends and the middle"""
        self.assertEqual(binary_search_index(self.odds, 1), 0)
        self.assertEqual(binary_search_index(self.odds, 7), 3)
        self.assertEqual(binary_search_index(self.odds, 11), 5)
        self.assertEqual(binary_search_index(self.odds, 6), -1)

    def test_edge_cases(self):
        """Test empty, single and two element sequences"""
        self.assertEqual(binary_search_index([], 5), -1)
        self.assertEqual(binary_search_index([5], 5), 0)
        self.assertEqual(binary_search_index([5], 3), -1)
        self.assertEqual(binary_search_index([1, 3], 1), 0)
        self.assertEqual(binary_search_index([1, 3], 3), 1)

    def test_other_types(self):
        """Test strings, negative numbers and floats"""
        fruits = ["apple", "banana", "cherry", "date"]
        self.assertEqual(binary_search_index(fruits, "cherry"), 2)
        self.assertEqual(binary_search_index(fruits, "grape"), -1)

        signed = [-10, -5, 0, 5, 10]
        self.assertEqual(binary_search_index(signed, -5), 1)
        self.assertEqual(binary_search_index(signed, 0), 2)
        self.assertEqual(binary_search_index(signed, 15), -1)

        floats = [1.5, 2.5, 3.5, 4.5]
        self.assertEqual(binary_search_index(floats, 3.5), 2)
        self.assertEqual(binary_search_index(floats, 2.0), -1)

    def test_large_sequence(self):
        """Test a large sorted sequence"""
        evens = [i * 2 for i in range(1000)]
        self.assertEqual(binary_search_index(evens, 500), 250)
        self.assertEqual(binary_search_index(evens, 1998), 999)
        self.assertEqual(binary_search_index(evens, 501), -1)

    def test_works_on_range(self):
        """Test that any sequence type is accepted"""
        self.assertEqual(binary_search_index(range(0, 100, 5), 35), 7)

    def test_counted(self):
        """Test comparison counting stays logarithmic"""
        self.assertEqual(binary_search_counted(self.odds, 7), (3, 3))
        _, comparisons = binary_search_counted(list(range(1_000_000)), 999_999)
        self.assertLessEqual(comparisons, 20)

    def test_check_sorted(self):
        """Test that ordering is verified on request"""
        self.assertEqual(find_unsorted_position(self.odds), -1)
        self.assertEqual(find_unsorted_position([1, 4, 2, 5]), 2)
        self.assertEqual(binary_search_index(self.odds, 9, check_sorted=True), 4)

        with self.assertRaises(UnsortedSequenceError) as ctx:
            binary_search_index([3, 1, 2], 1, check_sorted=True)
        self.assertEqual(ctx.exception.position, 1)
        self.assertIsInstance(ctx.exception, ValueError)

    def test_invalid_sequence(self):
        """Test that non-sequences fail fast"""
        with self.assertRaises(InvalidSequenceError):
            binary_search_index(iter([1, 2, 3]), 2)

    def test_incomparable_elements(self):
        """Test that mixed element types fail as invalid input"""
        with self.assertRaises(InvalidSequenceError):
            binary_search_index([1, "a", 3], 2)
        with self.assertRaises(InvalidSequenceError):
            find_unsorted_position([1, "a"])
        with self.assertRaises(TypeError):
            binary_search_index([1, "a", 3], 2, check_sorted=True)

    def test_agrees_with_linear_search(self):
        """Test binary search against linear search on sorted input"""
        rng = random.Random(11)
        for _ in range(200):
            sequence = sorted(rng.sample(range(100), rng.randint(0, 30)))
            target = rng.randint(-1, 100)
            self.assertEqual(
                binary_search_index(sequence, target),
                linear_search_index(sequence, target)
            )

    def test_duplicates_return_a_matching_index(self):
        """Test sorted input with duplicates"""
        rng = random.Random(13)
        for _ in range(100):
            sequence = sorted(rng.randint(0, 5) for _ in range(rng.randint(1, 20)))
            target = rng.choice(sequence)
            index = binary_search_index(sequence, target)
            self.assertEqual(sequence[index], target)


if __name__ == '__main__':
    unittest.main()
