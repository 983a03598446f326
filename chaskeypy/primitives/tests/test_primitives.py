"""Tests for the primitives module."""
import doctest
import unittest

from chaskeypy.bitvector.core import Variable

from chaskeypy.primitives.primitives import BvFunction


class TestBvFunction(unittest.TestCase):
    """Tests of the BvFunction class."""

    def setUp(self):
        class MyFunction(BvFunction):
            input_widths = [8, 8]
            output_widths = [8, 8]
            rounds = 1

            @classmethod
            def eval(cls, x, y):
                return x ^ y, x

        class MyIterFunction(BvFunction):
            input_widths = [8, 8]
            output_widths = [8]
            rounds = 2

            @classmethod
            def eval(cls, x, y):
                for i in range(cls.rounds):
                    x += y
                return tuple([x])

        self.func = MyFunction
        self.iter_func = MyIterFunction

    def test_creation(self):
        self.assertEqual(self.func(0, 0), (0x00, 0x00))
        self.assertEqual(self.func(3, 5), (0x06, 0x03))

        with self.assertRaises(TypeError):
            self.func(Variable("x", 8), Variable("y", 8))
        with self.assertRaises(ValueError):
            self.func(0)

    def test_symbolic_inputs(self):
        x, y = Variable("x", 8), Variable("y", 8)
        output = self.func(x, y, symbolic_inputs=True)
        self.assertEqual(str(output[0]), "x ^ y")
        self.assertEqual(output[1], x)

    def test_iterated(self):
        self.assertEqual(self.iter_func(0, 1), (2,))
        self.iter_func.set_rounds(3)
        self.assertEqual(self.iter_func(0, 1), (3,))

        with self.assertRaises(ValueError):
            self.iter_func.set_rounds(-1)
        with self.assertRaises(ValueError):
            self.iter_func.set_rounds("8")

    def test_with_rounds(self):
        func4 = self.iter_func.with_rounds(4)
        self.assertTrue(issubclass(func4, self.iter_func))
        self.assertEqual(func4(0, 1), (4,))
        self.assertEqual(self.iter_func.rounds, 2)


# noinspection PyUnusedLocal
def load_tests(loader, tests, ignore):
    """Add doctests."""
    import chaskeypy.primitives.primitives
    tests.addTests(doctest.DocTestSuite(chaskeypy.primitives.primitives))
    return tests
