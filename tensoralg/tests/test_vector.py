"""
Tests for tensoralg.vector helpers.
"""

import math
import unittest

import tensoralg as ta
from tensoralg import Scalar, Tensor


class TestVector(unittest.TestCase):

    def test_vector_is_rank_one_tensor(self):
        v = ta.vector([3, 4])
        self.assertIsInstance(v, Tensor)
        self.assertEqual(v.dimension, (2,))
        self.assertEqual(v, ta.make([3, 4]))

    def test_elements_are_coerced(self):
        self.assertEqual(ta.vector(["a", 3, [1, 2]]), ta.make([0, 3, 0]))
        self.assertEqual(ta.vector(["2.5"]), ta.make([2.5]))

    def test_empty_vector(self):
        self.assertEqual(ta.vector([]).dimension, (0,))

    def test_missing_argument(self):
        with self.assertRaises(ta.MissingArgumentError):
            ta.vector()

    def test_norm(self):
        self.assertEqual(ta.norm(ta.vector([3, 4])), 5.0)
        self.assertIsInstance(ta.norm([3, 4]), Scalar)
        self.assertTrue(math.isclose(ta.norm([1, 1]).value, math.sqrt(2)))

    def test_norm_of_matrix_is_frobenius(self):
        self.assertEqual(ta.norm([[1, 2], [2, 4]]), 5.0)

    def test_norm_of_empty_vector(self):
        self.assertEqual(ta.norm(ta.vector([])), 0)

    def test_vector_supports_core_operations(self):
        v = ta.vector([1, 2])
        self.assertEqual(v.plus([3, 4]), ta.make([4, 6]))
        self.assertEqual(v.outer(v), ta.make([[1, 2], [2, 4]]))


if __name__ == '__main__':
    unittest.main()
