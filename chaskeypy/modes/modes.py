"""Common machinery of the modes of operation built on Chaskey."""
import hmac

from chaskeypy.modes.buffer import Buffer, to_bytes
from chaskeypy.primitives.block import Block, BLOCK_SIZE
from chaskeypy.primitives.chaskey import DEFAULT_ROUNDS, Permutation
from chaskeypy.primitives.errors import KeyNotSet


def equals(expected, tag):
    """Compare a (possibly truncated) tag with *expected* in constant time.

    Only the first ``len(tag)`` bytes of *expected* are compared; an
    empty tag or a tag longer than *expected* never matches.

        >>> from chaskeypy.modes.modes import equals
        >>> equals(b"0123456789abcdef", b"01234567")
        True
        >>> equals(b"0123456789abcdef", b"")
        False

    """
    tag = to_bytes(tag)
    if not 0 < len(tag) <= len(expected):
        return False
    return hmac.compare_digest(expected[:len(tag)], tag)


class Mode(object):
    """Represent a keyed mode of operation of the Chaskey permutation.

    A mode owns a `Permutation`, a running `Block` state and a `Buffer`
    that turns the input stream into blocks. It is not meant to be
    instantiated but to provide a base class for `Mac`, `Cbc` and `Cloc`.

    Args:
        rounds: the number of rounds of the permutation.

    Attributes:
        block_size: the size in bytes of the blocks, keys and tags.
        permutation: the `Permutation` used by the mode.

    """

    block_size = BLOCK_SIZE

    def __init__(self, rounds=DEFAULT_ROUNDS):
        self.permutation = Permutation(rounds)
        self._key = None
        self._state = Block()
        self._buffer = Buffer(self.block_size)

    @property
    def rounds(self):
        return self.permutation.rounds

    def set(self, key):
        """Set the secret key (16 bytes or four 32-bit words)."""
        self._key = Block.from_key(key)
        self._state.assign(self._key)
        self._buffer.reset()

    def _check_key(self):
        if self._key is None:
            raise KeyNotSet("{}: key is not set".format(type(self).__name__))

    def _encipher(self, block):
        """Apply the Even-Mansour cipher XOR key, permute, XOR key in place."""
        block.xor(self._key)
        self.permutation.permute(block)
        block.xor(self._key)

    def __repr__(self):
        return "{}(rounds={})".format(type(self).__name__, self.rounds)
