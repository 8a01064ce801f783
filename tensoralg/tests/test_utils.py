"""
Tests for tensoralg.utils parsing and serialization.
"""

import os
import tempfile
import unittest

import numpy as np

import tensoralg as ta
from tensoralg import Scalar
from tensoralg import utils


class TestParse(unittest.TestCase):

    def test_parse_nested(self):
        self.assertEqual(utils.parse("[[1,2],[3,4]]"), ta.make([[1, 2], [3, 4]]))

    def test_parse_whitespace_and_number_forms(self):
        self.assertEqual(
            utils.parse(" [ 1 , -2.5e1 , .5, +3 ] "), ta.make([1, -25.0, 0.5, 3])
        )
        self.assertEqual(utils.parse("[inf,-inf]").tolist(), [float("inf"), float("-inf")])

    def test_parse_scalar_and_empty(self):
        self.assertEqual(utils.parse("5"), Scalar(5))
        self.assertEqual(utils.parse("[]"), ta.make([]))
        self.assertEqual(utils.parse("[[],[]]").dimension, (2, 0))

    def test_round_trip(self):
        for t in [
            ta.make([[1, 2], [3, 4]]),
            ta.make([[[0.5], [-1.25]], [[1e-05], [3e20]]]),
            ta.outer([1, 2, 3], [0.1, 0.2]),
            Scalar(-7),
            ta.make([]),
        ]:
            with self.subTest(t=t):
                parsed = utils.parse(str(t))
                self.assertEqual(parsed, t)
                self.assertEqual(parsed.dimension, t.dimension)

    def test_malformed_input(self):
        for text in ["[1,2", "[1,,2]", "[1,2]]", "abc", "", "[1 2]"]:
            with self.subTest(text=text):
                with self.assertRaises(ta.ParseError):
                    utils.parse(text)

    def test_jagged_text_fails(self):
        with self.assertRaises(ta.DimensionMismatchError):
            utils.parse("[[1],[2,3]]")


class TestSaveLoad(unittest.TestCase):

    def test_save_load(self):
        t = ta.make([[1.5, 2.0], [3.0, 4.0]])
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "t.npy")
            utils.save(t, path)
            loaded = utils.load(path)
        self.assertEqual(loaded, t)
        np.testing.assert_array_equal(loaded.numpy(), t.numpy())

    def test_save_load_scalar(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "s.npy")
            utils.save(Scalar(5), path)
            self.assertEqual(utils.load(path), Scalar(5))

    def test_save_accepts_raw_sequences(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "raw.npy")
            utils.save([[1, 2], [3, 4]], path)
            np.testing.assert_array_equal(np.load(path), [[1, 2], [3, 4]])


if __name__ == '__main__':
    unittest.main()
