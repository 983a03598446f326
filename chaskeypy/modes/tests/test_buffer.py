"""Tests for the buffer module."""
import doctest
import unittest

from hypothesis import given
from hypothesis.strategies import binary, integers

from chaskeypy.modes.buffer import Buffer, to_bytes
from chaskeypy.primitives.errors import InvalidInput


class TestToBytes(unittest.TestCase):
    """Tests of the to_bytes function."""

    def test_conversion(self):
        self.assertEqual(to_bytes("abc"), b"abc")
        self.assertEqual(to_bytes(bytearray(b"abc")), b"abc")
        self.assertEqual(to_bytes(memoryview(b"abc")), b"abc")
        with self.assertRaises(InvalidInput):
            to_bytes(None)
        with self.assertRaises(InvalidInput):
            to_bytes([1, 2, 3])


class TestBuffer(unittest.TestCase):
    """Tests of the Buffer class."""

    def test_initial_state(self):
        buf = Buffer()
        self.assertEqual((buf.len, buf.pos, buf.capacity), (0, 0, 16))
        self.assertFalse(buf.full())
        self.assertTrue(buf.last())
        self.assertEqual(buf.available(), 0)

    def test_pad_empty(self):
        buf = Buffer(4)
        self.assertTrue(buf.pad(0x80))
        self.assertEqual(bytes(buf.block()), b"\x80\x00\x00\x00")
        self.assertTrue(buf.full())

    def test_pad_block_boundary(self):
        buf = Buffer(4)
        buf.append(b"abcd")
        self.assertFalse(buf.pad(0x80))
        self.assertEqual(buf.len, 4)
        self.assertEqual(bytes(buf.block()), b"abcd")

    def test_pad_partial(self):
        buf = Buffer(4)
        buf.append(b"abcde")
        self.assertTrue(buf.pad(0x01))
        self.assertEqual(buf.len, 8)
        self.assertEqual(buf.bytes(), b"abcde\x01\x00\x00")
        self.assertEqual(buf.bytes(3), b"abc")

    def test_append_text(self):
        buf = Buffer(4)
        self.assertEqual(buf.append("é"), 2)
        with self.assertRaises(InvalidInput):
            buf.append(1)

    def test_drain(self):
        buf = Buffer(4)
        buf.append(b"abcdefghij")
        buf.move(b"ABCD")
        self.assertEqual(buf.drain(), b"ABCD")
        self.assertEqual(buf.drain(), b"")
        buf.move(b"EFGH")
        self.assertEqual(buf.drain(), b"EFGH")
        self.assertEqual(buf.available(), 2)
        buf.append(b"kl")
        self.assertTrue(buf.full())
        self.assertEqual(bytes(buf.block()), b"ijkl")
        self.assertEqual((buf.len, buf.pos, buf.capacity), (12, 8, 12))

    def test_bytes_after_drain(self):
        buf = Buffer(4)
        buf.append(b"abcdefghij")
        self.assertEqual(buf.bytes(6), b"abcdef")
        buf.next()
        buf.drain()
        self.assertEqual(buf.bytes(), b"efghij")
        self.assertEqual(buf.bytes(2), b"ef")
        self.assertEqual(buf.bytes(100), b"efghij")

    def test_reset(self):
        buf = Buffer(4)
        buf.append(b"abcdefghij")
        buf.reset()
        self.assertEqual((buf.len, buf.pos, buf.capacity), (0, 0, 4))
        self.assertEqual(bytes(buf.block()), bytes(4))

    @given(binary(), integers(min_value=1, max_value=32))
    def test_blocks(self, data, block_size):
        buf = Buffer(block_size)
        buf.append(data)
        self.assertEqual(buf.capacity % block_size, 0)
        self.assertTrue(buf.len <= buf.capacity < buf.len + block_size or not data)

        blocks = []
        while buf.full():
            blocks.append(bytes(buf.block()))
            buf.next()
        self.assertEqual(b"".join(blocks), data[:len(data) - len(data) % block_size])
        self.assertEqual(buf.available(), len(data) % block_size)


def load_tests(loader, tests, ignore):
    """Add doctests."""
    import chaskeypy.modes.buffer
    tests.addTests(doctest.DocTestSuite(chaskeypy.modes.buffer))
    return tests
