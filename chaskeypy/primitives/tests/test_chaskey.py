"""Tests for the Chaskey permutation."""
import doctest
import unittest

from hypothesis import given, settings
from hypothesis.strategies import integers, lists

from chaskeypy.bitvector.core import Constant, Variable
from chaskeypy.primitives.block import Block
from chaskeypy.primitives.chaskey import (
    ChaskeyPi, ChaskeyPiInverse, Permutation, derive, DEFAULT_ROUNDS
)
from chaskeypy.modes.vectors import TEST_KEY, SUBKEY1, SUBKEY2

words = lists(integers(min_value=0, max_value=2 ** 32 - 1), min_size=4, max_size=4)


class TestChaskeyPi(unittest.TestCase):
    """Tests of the ChaskeyPi and ChaskeyPiInverse functions."""

    def test_self_test(self):
        ChaskeyPi.test()
        self.assertEqual(ChaskeyPi.rounds, DEFAULT_ROUNDS)

    def test_zero_fixed_point(self):
        for rounds in [0, 1, 8, 12]:
            pi = ChaskeyPi.with_rounds(rounds)
            self.assertEqual(pi(0, 0, 0, 0), (0, 0, 0, 0))

    def test_zero_rounds(self):
        pi = ChaskeyPi.with_rounds(0)
        self.assertEqual(pi(1, 2, 3, 4), (1, 2, 3, 4))

    def test_symbolic(self):
        names = ["v0", "v1", "v2", "v3"]
        v = [Variable(n, 32) for n in names]
        pi = ChaskeyPi.with_rounds(1)
        output = pi(*v, symbolic_inputs=True)
        self.assertTrue(all(o.atoms(Variable) <= set(v) for o in output))

        values = {x: Constant(i + 1, 32) for i, x in enumerate(v)}
        evaluated = tuple(o.xreplace(values) for o in output)
        self.assertEqual(evaluated, pi(1, 2, 3, 4))

    @given(words, integers(min_value=0, max_value=12))
    @settings(deadline=None)
    def test_round_inverse(self, x, rounds):
        pi = ChaskeyPi.with_rounds(rounds)
        inverse_pi = ChaskeyPiInverse.with_rounds(rounds)
        self.assertEqual(inverse_pi(*pi(*x)), tuple(x))
        self.assertEqual(pi(*inverse_pi(*x)), tuple(x))


class TestDerive(unittest.TestCase):
    """Tests of the derive function."""

    def test_subkeys(self):
        subkey1 = derive(Block(TEST_KEY))
        self.assertEqual(subkey1, SUBKEY1)
        self.assertEqual(derive(subkey1), SUBKEY2)

    def test_unmodified(self):
        key = Block(TEST_KEY)
        derive(key)
        self.assertEqual(key, TEST_KEY)

    @given(words)
    def test_doubling(self, x):
        value = sum(w << (32 * i) for i, w in enumerate(x))
        doubled = value << 1
        if doubled >> 128:
            doubled = (doubled ^ 0x87) % 2 ** 128
        expected = [(doubled >> (32 * i)) % 2 ** 32 for i in range(4)]
        self.assertEqual(derive(Block(x)), expected)


class TestPermutation(unittest.TestCase):
    """Tests of the Permutation class."""

    def test_rounds(self):
        self.assertEqual(Permutation().rounds, DEFAULT_ROUNDS)
        self.assertEqual(Permutation(12).rounds, 12)
        self.assertEqual(ChaskeyPi.rounds, DEFAULT_ROUNDS)
        with self.assertRaises(ValueError):
            Permutation(-1)

    def test_independent_rounds(self):
        b8, b12 = Block([1, 2, 3, 4]), Block([1, 2, 3, 4])
        Permutation(8).permute(b8)
        Permutation(12).permute(b12)
        self.assertNotEqual(b8, b12)

    def test_single_round(self):
        p = Permutation()
        b = Block([1, 0, 0, 0])
        p.round(b)
        self.assertEqual(b, [0x00010000, 0x00000081, 0x00010000, 0x00010000])
        p.inv_round(b)
        self.assertEqual(b, [1, 0, 0, 0])

    def test_permute_is_iterated_round(self):
        p = Permutation(3)
        b, c = Block([5, 6, 7, 8]), Block([5, 6, 7, 8])
        p.permute(b)
        for i in range(3):
            p.round(c)
        self.assertEqual(b, c)

    @given(words, integers(min_value=0, max_value=12))
    @settings(deadline=None)
    def test_inverse(self, x, rounds):
        p = Permutation(rounds)
        b = Block(x)
        p.permute(b)
        p.inv_permute(b)
        self.assertEqual(b, x)


def load_tests(loader, tests, ignore):
    """Add doctests."""
    import chaskeypy.primitives.chaskey
    tests.addTests(doctest.DocTestSuite(chaskeypy.primitives.chaskey))
    return tests
