"""Tests for the block module."""
import doctest
import unittest

from hypothesis import given
from hypothesis.strategies import binary, integers, lists

from chaskeypy.bitvector.core import Constant
from chaskeypy.primitives.block import Block, BLOCK_SIZE
from chaskeypy.primitives.errors import ChaskeyError, InvalidInput, InvalidKeyLength

words = lists(integers(min_value=0, max_value=2 ** 32 - 1), min_size=4, max_size=4)


class TestBlock(unittest.TestCase):
    """Tests of the Block class."""

    def test_initialization(self):
        self.assertEqual(Block(), [0, 0, 0, 0])
        self.assertEqual(Block([1, 2, 3, 4]), Block([Constant(i, 32) for i in (1, 2, 3, 4)]))
        self.assertEqual(Block(bytes(range(16))), [0x03020100, 0x07060504, 0x0b0a0908, 0x0f0e0d0c])

        with self.assertRaises(InvalidInput):
            Block([1, 2, 3])
        with self.assertRaises(InvalidInput):
            Block([1, 2, 3, 2 ** 32])
        with self.assertRaises(InvalidInput):
            Block([1, 2, 3, -1])
        with self.assertRaises(InvalidInput):
            Block([1, 2, 3, Constant(1, 8)])
        with self.assertRaises(InvalidInput):
            Block(bytes(15))
        with self.assertRaises(InvalidInput):
            Block("0123456789abcdef")
        with self.assertRaises(InvalidInput):
            Block.from_bytes([0] * 16)

    def test_from_key(self):
        key = Block.from_key(b"0123456789abcdef")
        self.assertEqual(key, Block.from_key([0x33323130, 0x37363534, 0x62613938, 0x66656463]))
        self.assertEqual(key, Block.from_key("0123456789abcdef"))
        self.assertEqual(key, Block.from_key(key))
        self.assertIsNot(key, Block.from_key(key))

        for bad_key in [b"", bytes(15), bytes(17), "short", [1, 2, 3], [1, 2, 3, 4, 5]]:
            with self.assertRaises(InvalidKeyLength):
                Block.from_key(bad_key)

        with self.assertRaises(InvalidInput):
            Block.from_key(1234)
        with self.assertRaises(InvalidInput):
            Block.from_key([1, 2, 3, "4"])

    def test_error_kinds(self):
        self.assertTrue(issubclass(InvalidKeyLength, ChaskeyError))
        self.assertTrue(issubclass(InvalidKeyLength, ValueError))
        self.assertTrue(issubclass(InvalidInput, TypeError))

    def test_item_assignment(self):
        b = Block()
        b[3] = 0xffffffff
        self.assertEqual(b[3], 0xffffffff)
        self.assertEqual(b.raw(), bytes(12) + b"\xff" * 4)
        with self.assertRaises(InvalidInput):
            b[0] = 2 ** 32

    def test_copy(self):
        b = Block([1, 2, 3, 4])
        c = b.copy()
        c[0] = 5
        self.assertEqual(b[0], 1)
        b.assign(c)
        self.assertEqual(b, [5, 2, 3, 4])

    def test_xor_bytes(self):
        b = Block([0x04030201, 0, 0, 0])
        b.xor_bytes(b"\x01\x02")
        self.assertEqual(b, [0x04030000, 0, 0, 0])
        b.xor_bytes(b"")
        self.assertEqual(b, [0x04030000, 0, 0, 0])
        with self.assertRaises(InvalidInput):
            b.xor_bytes(bytes(17))

    def test_unhashable(self):
        with self.assertRaises(TypeError):
            hash(Block())

    @given(binary(min_size=BLOCK_SIZE, max_size=BLOCK_SIZE))
    def test_raw(self, data):
        self.assertEqual(Block.from_bytes(data).raw(), data)

    @given(words, words)
    def test_xor(self, x, y):
        b = Block(x)
        b.xor(Block(y))
        self.assertEqual(b, [i ^ j for i, j in zip(x, y)])
        b.xor(y)
        self.assertEqual(b, x)


def load_tests(loader, tests, ignore):
    """Add doctests."""
    import chaskeypy.primitives.block
    tests.addTests(doctest.DocTestSuite(chaskeypy.primitives.block))
    return tests
