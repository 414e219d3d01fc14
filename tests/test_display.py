"""
Test suite for answer formatting.

Author: xwest
"""

import math
import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from quickcalc import evaluate
from quickcalc.display import to_fixed, format_answer, describe_error


class TestDisplay(unittest.TestCase):
    """Test cases for to_fixed and format_answer."""

    def test_to_fixed(self):
        self.assertEqual(to_fixed(0.123456789), 0.1234568)
        self.assertEqual(to_fixed(2.5, 0), 3.0)
        self.assertEqual(to_fixed(-2.5, 0), -3.0)
        self.assertEqual(to_fixed(3.14159, 2), 3.14)
        self.assertEqual(to_fixed(math.inf), math.inf)

    def test_to_fixed_huge_value_is_unchanged(self):
        self.assertEqual(to_fixed(1e305), 1e305)

    def test_format_plain_numbers(self):
        cases = {
            3.0: "3",
            -4.0: "-4",
            1 / 3: "0.3333333",
            2 / 3: "0.6666667",
            0.00001: "0.00001",
            110.0: "110",
            1e9: "1000000000",
        }
        for value, expected in cases.items():
            with self.subTest(value=value):
                self.assertEqual(format_answer(value), expected)

    def test_format_drops_negative_zero(self):
        self.assertEqual(format_answer(-0.0), "0")
        self.assertEqual(format_answer(-1e-9), "0")

    def test_format_scientific(self):
        self.assertEqual(format_answer(2.5e10), "2.5E10")
        self.assertEqual(format_answer(1234567890.0), "1.2345679E9")
        self.assertEqual(format_answer(-3e12), "-3E12")

    def test_format_non_finite(self):
        self.assertEqual(format_answer(math.inf), "inf")
        self.assertEqual(format_answer(-math.inf), "-inf")
        self.assertEqual(format_answer(math.nan), "NaN")

    def test_format_places(self):
        self.assertEqual(format_answer(math.pi, 2), "3.14")
        self.assertEqual(format_answer(math.pi, 0), "3")

    def test_describe_error(self):
        result = evaluate("5 / 0")
        self.assertEqual(describe_error(result.error), "Division by zero")


if __name__ == '__main__':
    unittest.main()
