"""128-bit blocks made of four 32-bit words."""
import collections

from chaskeypy.bitvector.core import Constant, Term
from chaskeypy.primitives.errors import InvalidInput, InvalidKeyLength

WORD_WIDTH = 32
WORD_SIZE = WORD_WIDTH // 8
BLOCK_WORDS = 4
BLOCK_SIZE = BLOCK_WORDS * WORD_SIZE

_BYTES_TYPES = (bytes, bytearray, memoryview)


def _word(value):
    if isinstance(value, Term):
        if not isinstance(value, Constant) or value.width != WORD_WIDTH:
            raise InvalidInput("expected a 32-bit constant, got {}".format(value))
        return value
    elif isinstance(value, int) and not isinstance(value, bool):
        if not 0 <= value < 2 ** WORD_WIDTH:
            raise InvalidInput("word {:#x} out of range".format(value))
        return Constant(value, WORD_WIDTH)
    else:
        msg = "cannot convert '{}' to a 32-bit word"
        raise InvalidInput(msg.format(type(value).__name__))


def _words_from_bytes(data):
    data = bytes(data)
    assert len(data) == BLOCK_SIZE
    return [
        Constant.from_bytes(data[i:i + WORD_SIZE])
        for i in range(0, BLOCK_SIZE, WORD_SIZE)
    ]


def _to_words(value):
    if isinstance(value, Block):
        return list(value)
    elif isinstance(value, _BYTES_TYPES):
        if len(value) != BLOCK_SIZE:
            raise InvalidInput("expected {} bytes, got {}".format(BLOCK_SIZE, len(value)))
        return _words_from_bytes(value)
    elif isinstance(value, collections.abc.Sequence) and not isinstance(value, str):
        if len(value) != BLOCK_WORDS:
            raise InvalidInput("expected {} words, got {}".format(BLOCK_WORDS, len(value)))
        return [_word(w) for w in value]
    else:
        msg = "cannot convert '{}' to a block"
        raise InvalidInput(msg.format(type(value).__name__))


class Block(object):
    """Represent a 128-bit value as four 32-bit words.

    Each word is a 32-bit `Constant`; the byte view of a block is the
    concatenation of the words, each one in little-endian order.

        >>> from chaskeypy.primitives.block import Block
        >>> b = Block([1, 2, 3, 0x80000000])
        >>> b
        Block(0x00000001, 0x00000002, 0x00000003, 0x80000000)
        >>> b.raw().hex()
        '01000000020000000300000000000080'
        >>> b.xor(Block([1, 2, 3, 0]))
        >>> b == [0, 0, 0, 0x80000000]
        True

    The operations ending in place (`xor`, `assign`, item assignment)
    mutate the block; `copy` returns an independent block.
    """

    __slots__ = ["_words"]
    __hash__ = None

    def __init__(self, words=None):
        if words is None:
            words = [0] * BLOCK_WORDS
        self._words = _to_words(words)

    @classmethod
    def from_bytes(cls, data):
        """Return the block whose little-endian byte view is *data*."""
        if not isinstance(data, _BYTES_TYPES):
            msg = "expected a byte sequence, got '{}'"
            raise InvalidInput(msg.format(type(data).__name__))
        return cls(data)

    @classmethod
    def from_key(cls, key):
        """Return the block represented by a key.

        A key is 16 raw bytes, a text of 16 bytes once UTF-8 encoded,
        four 32-bit words or another `Block`.

            >>> from chaskeypy.primitives.block import Block
            >>> Block.from_key(b"0123456789abcdef") == Block.from_key("0123456789abcdef")
            True
            >>> Block.from_key(b"short")
            Traceback (most recent call last):
             ...
            chaskeypy.primitives.errors.InvalidKeyLength: key must be 16 bytes or 4 words, got 5

        """
        if isinstance(key, Block):
            return key.copy()
        if isinstance(key, str):
            key = key.encode("utf-8")
        if isinstance(key, _BYTES_TYPES):
            if len(key) != BLOCK_SIZE:
                msg = "key must be {} bytes or {} words, got {}"
                raise InvalidKeyLength(msg.format(BLOCK_SIZE, BLOCK_WORDS, len(key)))
            return cls(key)
        if isinstance(key, collections.abc.Sequence):
            if len(key) != BLOCK_WORDS:
                msg = "key must be {} bytes or {} words, got {}"
                raise InvalidKeyLength(msg.format(BLOCK_SIZE, BLOCK_WORDS, len(key)))
            return cls(key)
        msg = "cannot use '{}' as a key"
        raise InvalidInput(msg.format(type(key).__name__))

    def __iter__(self):
        return iter(self._words)

    def __len__(self):
        return BLOCK_WORDS

    def __getitem__(self, index):
        return self._words[index]

    def __setitem__(self, index, value):
        self._words[index] = _word(value)

    def __eq__(self, other):
        if isinstance(other, Block):
            return self._words == other._words
        elif isinstance(other, collections.abc.Sequence) and not isinstance(other, (str, bytes)):
            return len(other) == BLOCK_WORDS and all(
                w == o for w, o in zip(self._words, other))
        return NotImplemented

    def __repr__(self):
        return "{}({})".format(
            type(self).__name__, ", ".join(w.hex() for w in self._words))

    __str__ = __repr__

    def copy(self):
        """Return an independent copy of the block."""
        return type(self)(self)

    def assign(self, other):
        """Overwrite the block with the value of *other*."""
        self._words = _to_words(other)

    def xor(self, other):
        """XOR *other* (a block, four words or 16 bytes) into the block."""
        self._words = [w ^ o for w, o in zip(self._words, _to_words(other))]

    def xor_bytes(self, data):
        """XOR the first ``len(data)`` bytes of the byte view with *data*."""
        if len(data) > BLOCK_SIZE:
            raise InvalidInput("expected at most {} bytes, got {}".format(
                BLOCK_SIZE, len(data)))
        raw = bytearray(self.raw())
        for i, byte in enumerate(bytes(data)):
            raw[i] ^= byte
        self._words = _words_from_bytes(raw)

    def raw(self):
        """Return the 16-byte little-endian view of the block."""
        return b"".join(w.to_bytes() for w in self._words)
