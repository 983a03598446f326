"""Tests for the core module."""
import doctest
import unittest

from chaskeypy.bitvector.core import bitvectify, Constant, Term, Variable


class TestTerm(unittest.TestCase):
    """Tests of the Term class."""

    def test_invalid_width(self):
        with self.assertRaises(AssertionError):
            Term(width=-1)
        with self.assertRaises(AssertionError):
            Term(width=0)
        with self.assertRaises(AssertionError):
            Term(width="8")

    def test_initialization(self):
        t = Term(width=8)

        with self.assertRaises(AttributeError):
            t.width += 1

    def test_not_iterable(self):
        with self.assertRaises(AttributeError):
            list(Variable("x", 8))

    def test_invalid_index(self):
        x = Variable("x", 8)
        with self.assertRaises(IndexError):
            x[8]
        with self.assertRaises(IndexError):
            x[2:4]
        with self.assertRaises(TypeError):
            x["0"]


class TestVariable(unittest.TestCase):
    """Tests of the Variable class."""

    def test_invalid_args(self):
        with self.assertRaises(AssertionError):
            Variable(["v", "a", "r"], 8)
        with self.assertRaises(AssertionError):
            Variable(0, 8)

    def test_initialization(self):
        s = Variable("x", 8)
        self.assertTrue(s.is_Atom)
        self.assertEqual(s.atoms(), {s})
        self.assertEqual(str(s), "x")

        with self.assertRaises(AttributeError):
            s.name = 0

    def test_comparisons(self):
        x, y = Variable("x", 8), Variable("y", 8)
        x9 = Variable("x", 9)

        self.assertNotEqual(x, y)
        self.assertNotEqual(x, x9)
        self.assertEqual(x, Variable("x", 8))


class TestConstant(unittest.TestCase):
    """Tests of the Constant class."""

    def test_invalid_args(self):
        with self.assertRaises(AssertionError):
            Constant("1", 8)
        with self.assertRaises(AssertionError):
            Constant(0.5, 8)
        with self.assertRaises(AssertionError):
            Constant(-1, 8)
        with self.assertRaises(AssertionError):
            Constant(9, 2)

    def test_initialization(self):
        x = Constant(0, 8)

        self.assertTrue(x.is_Atom)
        self.assertEqual(x.atoms(), {x})

        with self.assertRaises(AttributeError):
            x.val = 0

    def test_comparisons(self):
        self.assertEqual(Constant(5, 8), 5)
        self.assertEqual(Constant(5, 8), Constant(5, 8))
        self.assertNotEqual(Constant(5, 8), Constant(5, 16))
        self.assertNotEqual(Constant(5, 8), "5")
        self.assertEqual(hash(Constant(5, 8)), hash(Constant(5, 8)))

    def test_bool(self):
        self.assertTrue(Constant(1, 1))
        self.assertFalse(Constant(0, 1))
        with self.assertRaises(AttributeError):
            bool(Constant(1, 8))

    def test_representation(self):
        self.assertEqual(int(Constant(0x87, 32)), 0x87)
        self.assertEqual(str(Constant(0x87, 32)), "0x00000087")
        self.assertEqual(str(Constant(5, 3)), "0b101")


class Testbitvectify(unittest.TestCase):
    """Tests of the bitvectify function."""

    def test_invalid_args(self):
        with self.assertRaises(TypeError):
            bitvectify(0.5, 8)
        with self.assertRaises(AssertionError):
            bitvectify(Constant(1, 4), 8)

    def test_conversion(self):
        self.assertEqual(bitvectify(1, 8), Constant(1, 8))
        self.assertEqual(bitvectify("x", 8), Variable("x", 8))
        x = Variable("x", 8)
        self.assertIs(bitvectify(x, 8), x)


def load_tests(loader, tests, ignore):
    """Add doctests."""
    import chaskeypy.bitvector.core
    tests.addTests(doctest.DocTestSuite(chaskeypy.bitvector.core))
    return tests
